"""Type definitions for :mod:`locale_schema`."""

import datetime
from typing import TypeAlias

LocaleValue: TypeAlias = str | int | float | bool | datetime.date | None
LocaleNode: TypeAlias = "LocaleValue | LocaleDict"
LocaleDict: TypeAlias = dict[str, LocaleNode]
Locales: TypeAlias = dict[str, LocaleDict]

# Leaf kinds a locale dictionary may hold; ``datetime.datetime`` is a ``date``.
LEAF_TYPES: tuple[type, ...] = (str, int, float, bool, datetime.date, type(None))

FormatValue: TypeAlias = LocaleValue
FormatParam: TypeAlias = dict[str, FormatValue]

CacheKeyType: TypeAlias = tuple[str, str | None, str | None, tuple[tuple[str, type, FormatValue], ...] | None]
CacheDict: TypeAlias = dict[CacheKeyType, str]

__all__ = [
    "FormatParam",
    "FormatValue",
    "LEAF_TYPES",
    "LocaleDict",
    "LocaleNode",
    "LocaleValue",
    "Locales",
    "CacheKeyType",
    "CacheDict",
]
