"""
Render translations whose call contract comes from the analyzed schema.
"""
import logging
from collections.abc import Iterable
from pathlib import Path

from locale_schema.flatten import flatten_locale
from locale_schema.loader import load_locale_file
from locale_schema.loader import load_many as load_many_files
from locale_schema.params import TemplateParser
from locale_schema.plural_rules import select_plural_category
from locale_schema.plurals import PLURAL_SEPARATOR
from locale_schema.schema import COUNT_FIELD, AnalysisOptions, LocaleSchema, SchemaAnalyzer
from locale_schema.scopes import resolve_key
from locale_schema.types import CacheDict, FormatParam, FormatValue, LocaleDict, LocaleNode, Locales, LocaleValue


class Translator:
    """
    Gets translations from a set of locales sharing one key structure.

    The dictionary of the default locale (or the first one loaded) is
    analyzed once; its schema decides which keys are plural and which
    parameters every call must provide.

    Args:
        default_locale: The default locale
        locales: The locales variable (dict) or path to locale file
        cache_max_size: Maximum number of memoized translations
        options: Settings for the schema analysis
    """

    __slots__ = (
        "_locales",
        "_flat",
        "_default_locale",
        "_previous_translations",
        "_cache_max_size",
        "_analyzer",
    )

    def __init__(
            self,
            default_locale: str,
            locales: LocaleDict | str | Path | None = None,
            *,
            cache_max_size: int = 2048,
            options: AnalysisOptions | None = None,
    ):
        if cache_max_size <= 0:
            raise ValueError("cache_max_size must be a positive integer")

        self._locales: Locales = {}
        self._flat: dict[str, dict[str, LocaleValue]] = {}
        self._default_locale: str = default_locale
        self._previous_translations: CacheDict = {}
        self._cache_max_size: int = cache_max_size
        self._analyzer = SchemaAnalyzer(options)

        if isinstance(locales, str | Path):
            self.load_from_file(Path(locales), default_locale)
        elif isinstance(locales, dict):
            self.load_from_value(locales, default_locale)

    @property
    def default_locale(self) -> str:
        """Get the default locale."""
        return self._default_locale

    @default_locale.setter
    def default_locale(self, value: str):
        """Set the default locale."""
        self._default_locale = value

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._locales)

    @property
    def schema(self) -> LocaleSchema:
        """
        Schema of the representative locale.

        Raises:
            KeyError: If no locale has been loaded
        """
        if self._default_locale in self._locales:
            return self._analyzer.analyze(self._locales[self._default_locale])
        for locale in self._locales:
            return self._analyzer.analyze(self._locales[locale])
        raise KeyError("No locales loaded")

    def load_from_file(self, file_path: str | Path, locale_identify: str):
        """
        Load locales from a file (JSON, YAML, or TOML).

        Args:
            file_path: Path to the locale file
            locale_identify: Locale identifier
        """
        self._update_locales(locale_identify, load_locale_file(file_path))

    def load_many(self, files: Iterable[tuple[str | Path, str]], max_workers: int | None = None) -> None:
        """Load multiple locale files concurrently.

        Args:
            files: Iterable of tuples (file_path, locale_identify)
            max_workers: Optional maximum number of worker threads
        """
        for locale, data in load_many_files(files, max_workers).items():
            self._update_locales(locale, data)

    def load_from_value(self, locales: LocaleDict, locale_identify: str):
        """
        Load locales from a dictionary value.

        Args:
            locales: The locales dictionary
            locale_identify: Locale identifier
        """
        self._update_locales(locale_identify, locales)

    def _update_locales(self, locale_identify: str, data: LocaleDict):
        merged = _merge_deep(
            self._locales.get(locale_identify, self._locales.get(self._default_locale)),
            data,
        )
        # Validate before storing so a broken file leaves the previous state intact
        entries = flatten_locale(merged, max_depth=self._analyzer.options.max_depth)

        self._locales[locale_identify] = merged
        self._flat[locale_identify] = {entry.path: entry.value for entry in entries}
        self._analyzer.clear()
        # Clear the corresponding translation cache to apply the new translated text
        for cache_key in list(self._previous_translations.keys()):
            if cache_key[1] == locale_identify:
                del self._previous_translations[cache_key]

    def get(
            self,
            key: str,
            locale: str | None = None,
            values: FormatParam | None = None,
            *,
            scope: str | None = None,
    ) -> str:
        """
        Get a translation with memoization from a key and format params.

        Args:
            key: Translation key (supports dot notation)
            locale: Optional locale override
            values: Values for the key's parameters; plural keys need ``count``
            scope: Optional scope the key is relative to

        Returns:
            Translated string, or the key itself if it cannot be rendered
        """
        try:
            locale = locale or self._default_locale
            # Value types are part of the key since True == 1 == 1.0
            values_tuple = tuple((k, type(v), v) for k, v in values.items()) if values else None
            cache_key = (key, locale, scope, values_tuple)

            if cache_key in self._previous_translations:
                return self._previous_translations[cache_key]

            if locale not in self._locales:
                raise KeyError(f"Locale '{locale}' not found in locales")

            path = resolve_key(key, scope)
            key_schema = self.schema.schema_for(path)
            missing = key_schema.missing(values)
            if missing:
                raise KeyError(f"Missing or invalid parameters for '{path}': {', '.join(missing)}")

            if key_schema.is_plural:
                count = values[COUNT_FIELD]  # type: ignore[index]
                path = self._plural_path(path, locale, count)  # type: ignore[arg-type]

            flat = self._flat[locale]
            if path not in flat:
                raise KeyError(f"Translation key '{path}' not found in locale '{locale}'")

            result = format_value(flat[path], values)

            # Bounded cache - prevent unbounded growth
            if len(self._previous_translations) >= self._cache_max_size:
                limit = self._cache_max_size // 4 if self._cache_max_size > 4 else 1
                keys_to_remove = list(self._previous_translations.keys())[: limit]
                for k in keys_to_remove:
                    del self._previous_translations[k]

            self._previous_translations[cache_key] = result
            return result

        except (KeyError, TypeError, ValueError) as error:
            logging.warning("Error: the key '%s' can not be translated - %s", key, error)
            return key

    def _plural_path(self, path: str, locale: str, count: int | float) -> str:
        flat = self._flat[locale]
        candidates = []
        if count == 0:
            candidates.append("zero")
        candidates.append(select_plural_category(count, locale))
        candidates.append("other")

        for suffix in candidates:
            variant = f"{path}{PLURAL_SEPARATOR}{suffix}"
            if variant in flat:
                return variant
        raise KeyError(f"No plural variant of '{path}' for count {count} in locale '{locale}'")


def format_value(value: LocaleValue, values: FormatParam | None = None) -> str:
    """
    Substitute parameters into a locale value.

    A value that is a plural directive renders the clause selected by its
    parameter. Placeholders without a supplied value are left as written.

    Args:
        value: The locale value
        values: Parameter values

    Returns:
        The rendered string
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        return _to_text(value)

    values = values or {}
    directive = TemplateParser.parse(value).directive
    if directive is None:
        return _substitute(value, values)

    count = values.get(directive.param)
    if isinstance(count, bool) or not isinstance(count, (int, float)):
        raise TypeError(f"Plural parameter '{directive.param}' must be a number, got {count!r}")
    clause = directive.select(count)
    return _substitute(clause.content, values) if clause is not None else ""


def _substitute(text: str, values: FormatParam) -> str:
    parts: list[str] = []
    pos = 0
    while True:
        start = text.find("{", pos)
        end = text.find("}", start + 1) if start != -1 else -1
        if end == -1:
            parts.append(text[pos:])
            return "".join(parts)
        name = text[start + 1:end]
        parts.append(text[pos:start])
        parts.append(_to_text(values[name]) if name in values else text[start:end + 1])
        pos = end + 1


def _to_text(value: FormatValue) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _merge_deep(base: LocaleNode, override: LocaleDict) -> LocaleDict:
    """Overlay ``override`` on a copy of ``base``; nested dictionaries merge."""
    merged: LocaleDict = dict(base) if isinstance(base, dict) else {}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = _merge_deep(current, value)
        else:
            merged[key] = value
    return merged


__all__ = ["Translator", "format_value"]
