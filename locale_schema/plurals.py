"""
Group ``key#<suffix>`` entries into plural families.

A locale marks the variants of a pluralized message by appending one of the
CLDR plural categories to the key::

    {"cat#one": "{count} cat", "cat#other": "{count} cats"}

Both entries collapse into one logical key ``cat``.
"""
import difflib
from collections.abc import Iterable
from dataclasses import dataclass, field

from locale_schema.diagnostics import DiagnosticCollector, DiagnosticKind
from locale_schema.errors import DuplicateKeyDefinition
from locale_schema.flatten import FlattenedEntry
from locale_schema.scopes import resolve_key
from locale_schema.types import LocaleValue

PLURAL_SUFFIXES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")
PLURAL_SEPARATOR = "#"

# Advisory ``count`` literals per category; any number is still accepted.
COUNT_HINTS: dict[str, tuple[int, ...]] = {
    "zero": (0,),
    "one": (1, 21, 31, 41, 51, 61, 71, 81, 91, 101),
    "two": (2, 22, 32, 42, 52, 62, 72, 82, 92, 102),
    "few": (),
    "many": (),
    "other": (),
}


@dataclass(frozen=True)
class PluralGroup:
    """The variants of one pluralized key, keyed by plural category."""

    base_key: str
    variants: dict[str, LocaleValue] = field(default_factory=dict)

    @property
    def suffixes(self) -> tuple[str, ...]:
        return tuple(self.variants)

    def variant_path(self, suffix: str) -> str:
        return f"{self.base_key}{PLURAL_SEPARATOR}{suffix}"


@dataclass(frozen=True)
class GroupedKeys:
    """Ordinary keys and plural groups of one locale, in authoring order."""

    ordinary: dict[str, LocaleValue]
    groups: dict[str, PluralGroup]
    keys: tuple[str, ...]

    def is_plural(self, key: str, scope: str | None = None) -> bool:
        return resolve_key(key, scope) in self.groups

    def __contains__(self, key: object) -> bool:
        return key in self.ordinary or key in self.groups


def split_plural_suffix(path: str) -> tuple[str, str] | None:
    """
    Split ``path`` into its base key and plural category.

    A suffix with nothing before it in its segment, as in ``#one`` or
    ``a.#one``, yields no base key; such paths stay plain keys instead of
    being grouped under ``""`` or ``a.``.

    Returns:
        ``(base_key, suffix)`` when the path ends with ``#<suffix>`` for an
        exactly recognized suffix, None otherwise
    """
    base, sep, token = path.rpartition(PLURAL_SEPARATOR)
    if not sep or token not in PLURAL_SUFFIXES:
        return None
    if not base or base.endswith("."):
        return None
    return base, token


def _resembles_suffix(token: str) -> bool:
    normalized = token.strip().lower()
    if normalized in PLURAL_SUFFIXES:
        return True
    return bool(difflib.get_close_matches(normalized, PLURAL_SUFFIXES, n=1, cutoff=0.8))


def group_plurals(
        entries: Iterable[FlattenedEntry],
        diagnostics: DiagnosticCollector | None = None,
) -> GroupedKeys:
    """
    Partition flattened entries into ordinary keys and plural groups.

    Args:
        entries: Flattened locale entries
        diagnostics: Optional collector for suffix tokens that look like a
            plural category without matching one exactly

    Returns:
        The grouped keys

    Raises:
        DuplicateKeyDefinition: If a base key is both an ordinary key and a
            plural group
    """
    ordinary: dict[str, LocaleValue] = {}
    groups: dict[str, PluralGroup] = {}
    keys: dict[str, None] = {}

    for entry in entries:
        split = split_plural_suffix(entry.path)
        if split is None:
            if diagnostics is not None:
                _check_suffix_token(entry.path, diagnostics)
            ordinary[entry.path] = entry.value
            keys.setdefault(entry.path)
            continue

        base_key, suffix = split
        group = groups.get(base_key)
        if group is None:
            group = groups[base_key] = PluralGroup(base_key)
        group.variants[suffix] = entry.value
        keys.setdefault(base_key)

    for key in keys:
        if key in ordinary and key in groups:
            raise DuplicateKeyDefinition(key)

    return GroupedKeys(ordinary, groups, tuple(keys))


def _check_suffix_token(path: str, diagnostics: DiagnosticCollector) -> None:
    base, sep, token = path.rpartition(PLURAL_SEPARATOR)
    if not sep or "." in token:
        return
    if token in PLURAL_SUFFIXES:
        diagnostics.report(
            DiagnosticKind.AMBIGUOUS_SUFFIX_TOKEN,
            path,
            f"plural suffix '{token}' has no base key, treated as a plain key",
        )
    elif _resembles_suffix(token):
        diagnostics.report(
            DiagnosticKind.AMBIGUOUS_SUFFIX_TOKEN,
            path,
            f"suffix '{token}' is not one of {', '.join(PLURAL_SUFFIXES)}, treated as a plain key",
        )


def count_hints(group: PluralGroup) -> tuple[int, ...]:
    """Sorted union of the advisory ``count`` literals of a group's categories."""
    hints: set[int] = set()
    for suffix in group.variants:
        hints.update(COUNT_HINTS[suffix])
    return tuple(sorted(hints))


__all__ = [
    "COUNT_HINTS",
    "GroupedKeys",
    "PLURAL_SEPARATOR",
    "PLURAL_SUFFIXES",
    "PluralGroup",
    "count_hints",
    "group_plurals",
    "split_plural_suffix",
]
