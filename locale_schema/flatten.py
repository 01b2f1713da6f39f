"""
Flatten nested locale dictionaries into dot-joined leaf paths.

Python dictionaries keep insertion order, so the authoring order of a locale
file is the order in which its leaves are emitted.
"""
from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

from locale_schema.errors import InvalidLocaleKey, InvalidLocaleValue, LocaleDepthExceeded
from locale_schema.types import LEAF_TYPES, LocaleDict, LocaleNode, LocaleValue

DEFAULT_MAX_DEPTH = 10


@dataclass(frozen=True)
class FlattenedEntry:
    """A leaf of a locale dictionary addressed by its full dotted path."""

    path: str
    value: LocaleValue


def flatten_locale(locale: LocaleDict, *, max_depth: int = DEFAULT_MAX_DEPTH) -> list[FlattenedEntry]:
    """
    Walk a locale dictionary depth-first and collect its leaves.

    Args:
        locale: The nested locale dictionary
        max_depth: Maximum number of nested dictionary levels

    Returns:
        Leaves in authoring order

    Raises:
        InvalidLocaleKey: If a key is not a string, is empty or contains '.'
        InvalidLocaleValue: If a leaf is not a supported locale value
        LocaleDepthExceeded: If the dictionary nests deeper than ``max_depth``
    """
    entries: list[FlattenedEntry] = []
    _walk(locale, "", 1, max_depth, entries)
    return entries


def _walk(node: LocaleDict, parent: str, depth: int, max_depth: int, out: list[FlattenedEntry]) -> None:
    if depth > max_depth:
        raise LocaleDepthExceeded(parent, max_depth)

    for key, value in node.items():
        if not isinstance(key, str) or not key or "." in key:
            raise InvalidLocaleKey(parent or "<root>", key)

        path = f"{parent}.{key}" if parent else key

        if isinstance(value, dict):
            _walk(cast(LocaleDict, value), path, depth + 1, max_depth, out)
        elif isinstance(value, LEAF_TYPES):
            out.append(FlattenedEntry(path, cast(LocaleValue, value)))
        else:
            raise InvalidLocaleValue(path, value)


def unflatten_locale(entries: Iterable[FlattenedEntry]) -> LocaleDict:
    """
    Rebuild the nested dictionary from flattened entries.

    Args:
        entries: Entries as returned by :func:`flatten_locale`

    Returns:
        The nested locale dictionary
    """
    root: LocaleDict = {}
    for entry in entries:
        *parents, leaf = entry.path.split(".")
        node = root
        for part in parents:
            child: LocaleNode = node.setdefault(part, {})
            if not isinstance(child, dict):
                raise InvalidLocaleKey(entry.path, part)
            node = child
        node[leaf] = entry.value
    return root


__all__ = ["DEFAULT_MAX_DEPTH", "FlattenedEntry", "flatten_locale", "unflatten_locale"]
