import json
from pathlib import Path

import pytest

from locale_schema.loader import SUPPORTED_SUFFIXES, load_locale_file, load_many, representative_locale

EN = {"hello": "Hello {name}", "cart": {"items#one": "One item", "items#other": "{count} items"}}


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_json(tmp_path: Path):
    assert load_locale_file(_write_json(tmp_path / "en.json", EN)) == EN


def test_load_yaml(tmp_path: Path):
    path = tmp_path / "en.yaml"
    path.write_text(
        "hello: Hello {name}\n"
        "cart:\n"
        "  items#one: One item\n"
        "  items#other: '{count} items'\n",
        encoding="utf-8",
    )
    assert load_locale_file(path) == EN


def test_load_toml(tmp_path: Path):
    path = tmp_path / "en.toml"
    path.write_text(
        'hello = "Hello {name}"\n'
        "[cart]\n"
        '"items#one" = "One item"\n'
        '"items#other" = "{count} items"\n',
        encoding="utf-8",
    )
    assert load_locale_file(path) == EN


def test_empty_yaml_is_an_empty_locale(tmp_path: Path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")
    assert load_locale_file(path) == {}


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_locale_file(tmp_path / "nope.json")


def test_unsupported_format(tmp_path: Path):
    path = tmp_path / "en.ini"
    path.write_text("x=1", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported file format"):
        load_locale_file(path)


def test_document_must_be_a_mapping(tmp_path: Path):
    with pytest.raises(ValueError, match="mapping"):
        load_locale_file(_write_json(tmp_path / "en.json", ["a", "b"]))


def test_invalid_json_propagates(tmp_path: Path):
    path = tmp_path / "en.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_locale_file(path)


def test_load_many_keeps_input_order(tmp_path: Path):
    files = [
        (_write_json(tmp_path / "fr.json", {"hello": "Bonjour {name}"}), "fr"),
        (_write_json(tmp_path / "en.json", {"hello": "Hello {name}"}), "en"),
        (_write_json(tmp_path / "de.json", {"hello": "Hallo {name}"}), "de"),
    ]
    locales = load_many(files, max_workers=2)
    assert list(locales) == ["fr", "en", "de"]
    assert locales["en"] == {"hello": "Hello {name}"}


def test_representative_locale():
    locales = {"fr": {"a": "1"}, "en": {"a": "2"}}
    assert representative_locale(locales) == {"a": "1"}
    assert representative_locale(locales, "en") == {"a": "2"}
    with pytest.raises(KeyError):
        representative_locale(locales, "de")
    with pytest.raises(KeyError):
        representative_locale({})


def test_suffix_is_case_insensitive(tmp_path: Path):
    path = tmp_path / "en.YML"
    path.write_text("hello: Hi\n", encoding="utf-8")
    assert load_locale_file(path) == {"hello": "Hi"}


def test_unsupported_format_lists_supported_suffixes(tmp_path: Path):
    path = tmp_path / "en.po"
    path.write_text("msgid x", encoding="utf-8")
    with pytest.raises(ValueError) as info:
        load_locale_file(path)
    for suffix in SUPPORTED_SUFFIXES:
        assert suffix in str(info.value)
