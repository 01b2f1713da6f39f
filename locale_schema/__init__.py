"""
locale_schema - key, scope and parameter schemas for nested locale dictionaries.

Modules:
- flatten: nested dictionary to dotted leaf paths
- scopes: namespace prefixes and scoped key resolution
- plurals: ``key#<category>`` plural groups
- params: placeholder and plural directive parsing
- schema: per-key parameter schema of a whole locale
- loader, translator, routing: file loading, rendering and locale path switching
"""

from locale_schema.diagnostics import Diagnostic, DiagnosticKind
from locale_schema.errors import (
    DuplicateKeyDefinition,
    InvalidLocaleKey,
    InvalidLocaleValue,
    LocaleDepthExceeded,
    LocaleSchemaError,
    LocaleValueTooLong,
)
from locale_schema.flatten import FlattenedEntry, flatten_locale, unflatten_locale
from locale_schema.loader import load_locale_file, load_many, representative_locale
from locale_schema.params import ParsedTemplate, parse_params, parse_template
from locale_schema.plurals import PLURAL_SUFFIXES, GroupedKeys, PluralGroup, group_plurals
from locale_schema.routing import change_locale_path
from locale_schema.schema import (
    AnalysisOptions,
    CountField,
    LocaleSchema,
    ParameterSchema,
    SchemaAnalyzer,
    analyze,
)
from locale_schema.scopes import extract_scopes, resolve_key
from locale_schema.translator import Translator

__version__ = "0.1.0"

__all__ = [
    "AnalysisOptions",
    "CountField",
    "Diagnostic",
    "DiagnosticKind",
    "DuplicateKeyDefinition",
    "FlattenedEntry",
    "GroupedKeys",
    "InvalidLocaleKey",
    "InvalidLocaleValue",
    "LocaleDepthExceeded",
    "LocaleSchema",
    "LocaleSchemaError",
    "LocaleValueTooLong",
    "PLURAL_SUFFIXES",
    "ParameterSchema",
    "ParsedTemplate",
    "PluralGroup",
    "SchemaAnalyzer",
    "Translator",
    "analyze",
    "change_locale_path",
    "extract_scopes",
    "flatten_locale",
    "group_plurals",
    "load_locale_file",
    "load_many",
    "parse_params",
    "parse_template",
    "representative_locale",
    "resolve_key",
    "unflatten_locale",
]
