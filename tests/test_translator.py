import json
import logging
from pathlib import Path

import pytest

from locale_schema.errors import DuplicateKeyDefinition
from locale_schema.plural_rules import select_plural_category
from locale_schema.translator import Translator, format_value

EN = {
    "hello": "Hello {name}",
    "year": 2024,
    "home": {"title": "Welcome to {site}"},
    "cart": {
        "items#zero": "Your cart is empty",
        "items#one": "{count} item for {user}",
        "items#other": "{count} items for {user}",
    },
    "files": "{n, plural, =0 {no files} =1 {one file} other {{n} files}}",
}

RU = {
    "hello": "Привет {name}",
    "home": {"title": "Добро пожаловать на {site}"},
    "cart": {
        "items#one": "{count} товар для {user}",
        "items#few": "{count} товара для {user}",
        "items#many": "{count} товаров для {user}",
        "items#other": "{count} товара для {user}",
    },
}


@pytest.fixture
def translator() -> Translator:
    t = Translator("en", EN)
    t.load_from_value(RU, "ru")
    return t


def test_plain_key(translator: Translator):
    assert translator.get("hello", values={"name": "Ada"}) == "Hello Ada"
    assert translator.get("hello", "ru", {"name": "Ада"}) == "Привет Ада"


def test_scoped_key(translator: Translator):
    assert translator.get("title", values={"site": "docs"}, scope="home") == "Welcome to docs"


def test_non_string_leaf(translator: Translator):
    assert translator.get("year") == "2024"


def test_english_plurals(translator: Translator):
    assert translator.get("cart.items", values={"count": 0, "user": "Ada"}) == "Your cart is empty"
    assert translator.get("cart.items", values={"count": 1, "user": "Ada"}) == "1 item for Ada"
    assert translator.get("cart.items", values={"count": 2.0, "user": "Ada"}) == "2 items for Ada"


def test_russian_plurals(translator: Translator):
    assert translator.get("items", "ru", {"count": 21, "user": "Ада"}, scope="cart") == "21 товар для Ада"
    assert translator.get("items", "ru", {"count": 3, "user": "Ада"}, scope="cart") == "3 товара для Ада"
    assert translator.get("items", "ru", {"count": 5, "user": "Ада"}, scope="cart") == "5 товаров для Ада"


def test_zero_variant_falls_back_to_default_locale_entry(translator: Translator):
    # ru is merged over en, so the en zero variant is still available
    assert translator.get("cart.items", "ru", {"count": 0, "user": "Ада"}) == "Your cart is empty"


def test_plural_directive(translator: Translator):
    assert translator.get("files", values={"n": 0}) == "no files"
    assert translator.get("files", values={"n": 1}) == "one file"
    assert translator.get("files", values={"n": 7}) == "7 files"


def test_missing_locale_key_falls_back_to_default(translator: Translator):
    assert translator.get("files", "ru", {"n": 1}) == "one file"


def test_missing_parameter_returns_key(translator: Translator, caplog):
    with caplog.at_level(logging.WARNING):
        assert translator.get("hello") == "hello"
    assert "name" in caplog.text


def test_missing_count_returns_key(translator: Translator):
    assert translator.get("cart.items", values={"user": "Ada"}) == "cart.items"
    assert translator.get("cart.items", values={"count": "3", "user": "Ada"}) == "cart.items"


def test_unknown_key_and_locale(translator: Translator):
    assert translator.get("nope") == "nope"
    assert translator.get("hello", "de", {"name": "x"}) == "hello"


def test_reload_clears_cache(translator: Translator):
    assert translator.get("hello", values={"name": "Ada"}) == "Hello Ada"
    translator.load_from_value({"hello": "Hi {name}"}, "en")
    assert translator.get("hello", values={"name": "Ada"}) == "Hi Ada"


def test_schema(translator: Translator):
    schema = translator.schema
    assert schema.is_plural("items", "cart")
    assert schema.schema_for("cart.items").fields == ("count", "user")
    assert schema.schema_for("files").params == ("n", "n")
    assert translator.schema is schema


def test_load_from_file(tmp_path: Path):
    path = tmp_path / "en.json"
    path.write_text(json.dumps({"a": "{x}!"}), encoding="utf-8")
    translator = Translator("en", path)
    assert translator.get("a", values={"x": 1}) == "1!"
    assert translator.locales == ("en",)


def test_load_many(tmp_path: Path):
    (tmp_path / "en.json").write_text(json.dumps({"a": "A"}), encoding="utf-8")
    (tmp_path / "fr.json").write_text(json.dumps({"a": "À"}), encoding="utf-8")
    translator = Translator("en")
    translator.load_many([(tmp_path / "en.json", "en"), (tmp_path / "fr.json", "fr")])
    assert translator.get("a", "fr") == "À"


def test_invalid_locale_is_rejected_on_load():
    translator = Translator("en", {"a": "A"})
    with pytest.raises(ValueError):
        translator.load_from_value({"b": {"c.d": "x"}}, "fr")
    assert translator.locales == ("en",)


def test_duplicate_key_is_reported_on_get(caplog):
    translator = Translator("en", {"greet": "hi", "greet#one": "hi"})
    with pytest.raises(DuplicateKeyDefinition):
        _ = translator.schema
    with caplog.at_level(logging.WARNING):
        assert translator.get("greet") == "greet"


def test_schema_without_locales():
    with pytest.raises(KeyError):
        _ = Translator("en").schema


def test_invalid_cache_size():
    with pytest.raises(ValueError):
        Translator("en", cache_max_size=0)


def test_format_value():
    assert format_value("Hi {a} {b}", {"a": "x"}) == "Hi x {b}"
    assert format_value(None) == ""
    assert format_value("{a", {"a": 1}) == "{a"
    with pytest.raises(TypeError):
        format_value("{n, plural, =0 {a} other {b}}", {"n": "zero"})


def test_select_plural_category():
    assert select_plural_category(1, "en") == "one"
    assert select_plural_category(5, "en-US") == "other"
    assert select_plural_category(5, "ru") == "many"
    assert select_plural_category(1, "not a locale") == "one"
    assert select_plural_category(3, "not a locale") == "other"


def test_boolean_count_is_rejected_after_integer_count_was_cached():
    translator = Translator("en", {"cat#one": "{count} cat", "cat#other": "{count} cats"})
    assert translator.get("cat", values={"count": 1}) == "1 cat"
    assert translator.get("cat", values={"count": True}) == "cat"


def test_cached_values_are_told_apart_by_type():
    translator = Translator("en", {"a": "{x}!"})
    assert translator.get("a", values={"x": 1}) == "1!"
    assert translator.get("a", values={"x": True}) == "True!"
    assert translator.get("a", values={"x": 1.5}) == "1.5!"
