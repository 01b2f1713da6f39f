"""
Derive the per-key parameter schema of a locale dictionary.

The schema is the call contract a renderer must honor: for every logical key,
the named parameters the caller supplies and, for plural keys, the numeric
``count`` that selects a variant.
"""
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from locale_schema.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind
from locale_schema.flatten import DEFAULT_MAX_DEPTH, FlattenedEntry, flatten_locale
from locale_schema.params import DEFAULT_MAX_VALUE_LENGTH, ParsedTemplate, parse_template
from locale_schema.plurals import GroupedKeys, PluralGroup, count_hints, group_plurals
from locale_schema.scopes import extract_scopes, resolve_key, strip_scope
from locale_schema.types import LocaleDict, LocaleValue

COUNT_FIELD = "count"


@dataclass(frozen=True)
class AnalysisOptions:
    """
    Settings for one analysis.

    Args:
        max_depth: Maximum nesting of the locale dictionary
        max_value_length: Maximum length of a single string value
        verbose: Log every diagnostic as a warning
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH
    verbose: bool = False


@dataclass(frozen=True)
class CountField:
    """The numeric ``count`` parameter of a plural key."""

    suffixes: tuple[str, ...]
    hints: tuple[int, ...] = ()

    @staticmethod
    def accepts(value: object) -> bool:
        # Hints are advisory: every real number is a valid count.
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "number", "suffixes": list(self.suffixes), "hints": list(self.hints)}


@dataclass(frozen=True)
class ParameterSchema:
    """
    Parameters a caller must supply to render one key.

    For plain keys ``params`` is the placeholder list as written, duplicates
    included. For plural keys it is the union of the variants' placeholders
    without ``count``, which is described by ``count`` instead.
    """

    key: str
    params: tuple[str, ...] = ()
    count: CountField | None = None

    @property
    def is_plural(self) -> bool:
        return self.count is not None

    @property
    def fields(self) -> tuple[str, ...]:
        if self.count is not None:
            return (COUNT_FIELD, *self.params)
        return self.params

    @property
    def requires_values(self) -> bool:
        return bool(self.fields)

    def missing(self, values: dict[str, Any] | None) -> list[str]:
        """Names in :attr:`fields` that ``values`` does not provide."""
        values = values or {}
        missing = [name for name in dict.fromkeys(self.fields) if name not in values]
        if self.count is not None and COUNT_FIELD in values and not self.count.accepts(values[COUNT_FIELD]):
            missing.append(COUNT_FIELD)
        return missing

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"plural": self.is_plural, "params": list(self.params)}
        if self.count is not None:
            data[COUNT_FIELD] = self.count.to_dict()
        return data


@dataclass(frozen=True)
class LocaleSchema:
    """The analyzed structure of one locale dictionary."""

    entries: tuple[FlattenedEntry, ...]
    keys: tuple[str, ...]
    scopes: tuple[str, ...]
    groups: dict[str, PluralGroup]
    schemas: dict[str, ParameterSchema]
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    def is_plural(self, key: str, scope: str | None = None) -> bool:
        return resolve_key(key, scope) in self.groups

    def schema_for(self, key: str, scope: str | None = None) -> ParameterSchema:
        """
        Get the parameter schema of a key.

        Raises:
            KeyError: If the key is not defined
        """
        path = resolve_key(key, scope)
        try:
            return self.schemas[path]
        except KeyError:
            raise KeyError(f"Translation key '{path}' is not defined") from None

    def keys_in_scope(self, scope: str | None = None) -> tuple[str, ...]:
        """Keys addressable relative to ``scope``, with the scope prefix removed."""
        relative = (strip_scope(key, scope) for key in self.keys)
        return tuple(key for key in relative if key is not None)

    def __contains__(self, key: object) -> bool:
        return key in self.schemas

    def __len__(self) -> int:
        return len(self.keys)

    def to_dict(self) -> dict[str, Any]:
        return {
            "keys": {key: self.schemas[key].to_dict() for key in self.keys},
            "scopes": list(self.scopes),
            "diagnostics": [item.to_dict() for item in self.diagnostics],
        }


def analyze(locale: LocaleDict, *, options: AnalysisOptions | None = None) -> LocaleSchema:
    """
    Analyze a representative locale dictionary.

    Args:
        locale: The nested locale dictionary
        options: Analysis settings

    Returns:
        The locale schema

    Raises:
        DuplicateKeyDefinition: If a key is both a plain and a plural key
        LocaleSchemaError: If the dictionary holds invalid keys or values
    """
    options = options or AnalysisOptions()
    diagnostics = DiagnosticCollector(verbose=options.verbose)

    entries = flatten_locale(locale, max_depth=options.max_depth)
    grouped = group_plurals(entries, diagnostics)
    scopes = extract_scopes(entry.path for entry in entries)
    schemas = aggregate_params(grouped, diagnostics, max_value_length=options.max_value_length)

    return LocaleSchema(
        entries=tuple(entries),
        keys=grouped.keys,
        scopes=scopes,
        groups=grouped.groups,
        schemas=schemas,
        diagnostics=diagnostics.items,
    )


def aggregate_params(
        grouped: GroupedKeys,
        diagnostics: DiagnosticCollector | None = None,
        *,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
) -> dict[str, ParameterSchema]:
    """
    Build the parameter schema of every logical key.

    Args:
        grouped: Output of :func:`group_plurals`
        diagnostics: Optional collector for lenient parsing findings
        max_value_length: Maximum length of a single string value

    Returns:
        Schemas keyed by logical key, in authoring order
    """
    schemas: dict[str, ParameterSchema] = {}
    for key in grouped.keys:
        group = grouped.groups.get(key)
        if group is None:
            parsed = _parse(key, grouped.ordinary[key], diagnostics, max_value_length)
            schemas[key] = ParameterSchema(key, parsed.params)
        else:
            schemas[key] = _plural_schema(group, diagnostics, max_value_length)
    return schemas


def _plural_schema(
        group: PluralGroup,
        diagnostics: DiagnosticCollector | None,
        max_value_length: int,
) -> ParameterSchema:
    parsed = (
        _parse(group.variant_path(suffix), value, diagnostics, max_value_length)
        for suffix, value in group.variants.items()
    )
    return ParameterSchema(
        group.base_key,
        merge_params(item.params for item in parsed),
        CountField(group.suffixes, count_hints(group)),
    )


def merge_params(variants: Iterable[Iterable[str]]) -> tuple[str, ...]:
    """Union of the variants' parameters in first-seen order, without ``count``."""
    merged: dict[str, None] = {}
    for params in variants:
        for name in params:
            if name != COUNT_FIELD:
                merged.setdefault(name)
    return tuple(merged)


def _parse(
        path: str,
        value: LocaleValue,
        diagnostics: DiagnosticCollector | None,
        max_value_length: int,
) -> ParsedTemplate:
    parsed = parse_template(value, path=path, max_length=max_value_length)
    if diagnostics is None:
        return parsed

    if parsed.malformed:
        diagnostics.report(
            DiagnosticKind.MALFORMED_PLURAL_DIRECTIVE,
            path,
            "value looks like a plural directive but does not match it, placeholders scanned as plain text",
        )
    if parsed.empty_placeholders:
        diagnostics.report(
            DiagnosticKind.EMPTY_PLACEHOLDER,
            path,
            f"{parsed.empty_placeholders} empty placeholder(s) '{{}}' ignored",
        )
    for name in parsed.duplicates:
        diagnostics.report(
            DiagnosticKind.DUPLICATE_PARAMETER,
            path,
            f"parameter '{name}' appears more than once",
        )
    return parsed


class SchemaAnalyzer:
    """
    Analyzes locale dictionaries, memoizing results by dictionary identity.

    A cached schema is returned for the very same dictionary object, so a
    dictionary must not be mutated after it has been analyzed; call
    :meth:`clear` if it is.

    Args:
        options: Analysis settings
        cache_max_size: Maximum number of cached schemas
    """

    __slots__ = ("_options", "_cache", "_cache_max_size")

    def __init__(self, options: AnalysisOptions | None = None, *, cache_max_size: int = 128):
        if cache_max_size <= 0:
            raise ValueError("cache_max_size must be a positive integer")

        self._options: AnalysisOptions = options or AnalysisOptions()
        # The dictionary is kept alongside its schema so its id cannot be reused while cached
        self._cache: dict[int, tuple[LocaleDict, LocaleSchema]] = {}
        self._cache_max_size: int = cache_max_size

    @property
    def options(self) -> AnalysisOptions:
        return self._options

    def analyze(self, locale: LocaleDict) -> LocaleSchema:
        cached = self._cache.get(id(locale))
        if cached is not None and cached[0] is locale:
            return cached[1]

        schema = analyze(locale, options=self._options)

        if len(self._cache) >= self._cache_max_size:
            # FIFO eviction of the oldest quarter
            limit = self._cache_max_size // 4 if self._cache_max_size > 4 else 1
            for key in list(self._cache.keys())[:limit]:
                del self._cache[key]

        self._cache[id(locale)] = (locale, schema)
        return schema

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


__all__ = [
    "AnalysisOptions",
    "COUNT_FIELD",
    "CountField",
    "LocaleSchema",
    "ParameterSchema",
    "SchemaAnalyzer",
    "aggregate_params",
    "analyze",
    "merge_params",
]
