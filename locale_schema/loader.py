"""
Load locale dictionaries from JSON, YAML and TOML files.
"""
import json
import mmap
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import cast

from locale_schema.types import LocaleDict, Locales

try:
    import yaml
except ImportError:
    yaml = None

try:
    import tomli
except ImportError:
    tomli = None

YAML_SUFFIXES = (".yaml", ".yml")
SUPPORTED_SUFFIXES = (".json", *YAML_SUFFIXES, ".toml")


def load_locale_file(file_path: str | Path) -> LocaleDict:
    """
    Load one locale dictionary from a file.

    Args:
        file_path: Path to a ``.json``, ``.yaml``, ``.yml`` or ``.toml`` file

    Returns:
        The nested locale dictionary

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is unsupported or the document is not a mapping
        ImportError: If the parser for the format is not installed
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Locale file not found: {file_path}")

    data = _load_path(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Locale file {path} must contain a mapping, got {type(data).__name__}")
    return cast(LocaleDict, data)


def _load_path(path: Path) -> object:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: {', '.join(SUPPORTED_SUFFIXES)}")
    if suffix == ".json":
        try:
            with open(path, "rb") as f:
                with mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ) as mm:
                    return json.loads(mm.read().decode("utf-8"))
        except (ValueError, OSError) as error:
            if isinstance(error, json.JSONDecodeError):
                raise
            # mmap refuses empty files and some special filesystems
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
    if suffix in YAML_SUFFIXES:
        if yaml is None:
            raise ImportError("PyYAML is required for YAML support. Install with: pip install pyyaml")
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    if tomli is None:
        raise ImportError("tomli is required for TOML support. Install with: pip install tomli")
    with open(path, "rb") as f:
        return tomli.load(f)


def load_many(files: Iterable[tuple[str | Path, str]], max_workers: int | None = None) -> Locales:
    """
    Load multiple locale files concurrently.

    Args:
        files: Iterable of tuples (file_path, locale_identify)
        max_workers: Optional maximum number of worker threads

    Returns:
        Locale dictionaries keyed by locale, in the order the files were given
    """
    pending = list(files)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [(locale, executor.submit(load_locale_file, path)) for path, locale in pending]
        return {locale: future.result() for locale, future in futures}


def representative_locale(locales: Locales, locale: str | None = None) -> LocaleDict:
    """
    Pick the dictionary whose shape stands for every locale.

    All locales are expected to share one key structure, so any of them will
    do; without an explicit ``locale`` the first inserted one is used.

    Raises:
        KeyError: If ``locale`` is given but missing, or ``locales`` is empty
    """
    if locale is not None:
        if locale not in locales:
            raise KeyError(f"Locale '{locale}' not found in locales")
        return locales[locale]
    for first in locales:
        return locales[first]
    raise KeyError("No locales loaded")


__all__ = ["SUPPORTED_SUFFIXES", "load_locale_file", "load_many", "representative_locale"]
