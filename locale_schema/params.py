"""Placeholder extraction for translation templates.

Two template shapes are understood:

* plain placeholders, ``"Hello {name}"``;
* a single ICU-style plural directive spanning the whole value, with two or
  three clauses, ``"{n, plural, =0 {no items} other {{n} items}}"``.

Anything else is scanned flatly for ``{...}`` placeholders. The parser never
rejects a template.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from .errors import LocaleValueTooLong
from .types import LocaleValue

DEFAULT_MAX_VALUE_LENGTH = 65536

_PLURAL_MARKER = ", plural, "
_SELECTOR = re.compile(r"=-?\d+|other")
_LOOKS_LIKE_DIRECTIVE = re.compile(r"\{[^{}]*,\s*plural\s*,")
_CLAUSE_COUNTS = (2, 3)


@dataclass(frozen=True)
class PluralClause:
    """One ``<selector> {<content>}`` clause of a plural directive."""

    selector: str
    content: str

    @property
    def is_other(self) -> bool:
        return self.selector == "other"

    def matches(self, count: int | float) -> bool:
        return self.is_other or count == int(self.selector[1:])


@dataclass(frozen=True)
class PluralDirective:
    param: str
    clauses: tuple[PluralClause, ...]

    def select(self, count: int | float) -> PluralClause | None:
        """Pick the first exact ``=N`` clause matching ``count``, else ``other``."""
        for clause in self.clauses:
            if not clause.is_other and clause.matches(count):
                return clause
        for clause in self.clauses:
            if clause.is_other:
                return clause
        return None


@dataclass(frozen=True)
class ParsedTemplate:
    """Result of parsing one template string.

    Attributes:
        params: Placeholder names in order of appearance, duplicates kept
        directive: The plural directive when the whole value is one
        malformed: True when the value looks like a plural directive but does
            not match the two- or three-clause grammar
        empty_placeholders: Number of ``{}`` occurrences skipped by the scan
    """

    params: tuple[str, ...] = ()
    directive: PluralDirective | None = None
    malformed: bool = False
    empty_placeholders: int = 0

    @property
    def duplicates(self) -> tuple[str, ...]:
        seen: set[str] = set()
        repeated: dict[str, None] = {}
        for name in self.params:
            if name in seen:
                repeated.setdefault(name)
            seen.add(name)
        return tuple(repeated)


class TemplateParser:
    """Parser for placeholder and plural-directive templates."""

    @staticmethod
    @functools.lru_cache(maxsize=4096)
    def parse(text: str) -> ParsedTemplate:
        """Parse and cache a template string.

        Args:
            text: Template string

        Returns:
            The parsed template
        """
        if not text:
            return ParsedTemplate()

        directive = TemplateParser.match_directive(text)
        if directive is not None:
            params = [directive.param]
            empty = 0
            for clause in directive.clauses:
                names, skipped = TemplateParser.scan(clause.content)
                params.extend(names)
                empty += skipped
            return ParsedTemplate(tuple(params), directive, empty_placeholders=empty)

        names, skipped = TemplateParser.scan(text)
        malformed = _LOOKS_LIKE_DIRECTIVE.search(text) is not None
        return ParsedTemplate(tuple(names), malformed=malformed, empty_placeholders=skipped)

    @staticmethod
    def scan(text: str) -> tuple[list[str], int]:
        """Collect ``{name}`` placeholders from left to right.

        A name runs from a ``{`` to the next ``}``; braces do not nest. Empty
        braces ``{}`` are not collected as a parameter named ``""``; they are
        only counted so callers can report them.

        Args:
            text: Text to scan

        Returns:
            The names found and the number of empty ``{}`` pairs skipped
        """
        names: list[str] = []
        empty = 0
        pos = 0
        while True:
            start = text.find("{", pos)
            if start == -1:
                break
            end = text.find("}", start + 1)
            if end == -1:
                break
            name = text[start + 1:end]
            if name:
                names.append(name)
            else:
                empty += 1
            pos = end + 1
        return names, empty

    @staticmethod
    def match_directive(text: str) -> PluralDirective | None:
        """Match ``text`` against the two- and three-clause plural grammar.

        Args:
            text: Whole template string

        Returns:
            The directive, or None when ``text`` is not exactly one directive
        """
        if not (text.startswith("{") and text.endswith("}")):
            return None

        marker = text.find(_PLURAL_MARKER)
        if marker == -1:
            return None

        param = text[1:marker]
        if not param or "{" in param or "}" in param:
            return None

        end = len(text) - 1
        pos = marker + len(_PLURAL_MARKER)
        clauses: list[PluralClause] = []

        while len(clauses) < max(_CLAUSE_COUNTS):
            selector = _SELECTOR.match(text, pos)
            if selector is None:
                return None
            pos = selector.end()
            if text[pos:pos + 2] != " {":
                return None
            pos += 2

            close = TemplateParser._closing_brace(text, pos)
            if close == -1 or close >= end:
                return None
            clauses.append(PluralClause(selector.group(), text[pos:close]))

            pos = close + 1
            if pos == end:
                break
            if text[pos] != " ":
                return None
            pos += 1
        else:
            return None

        if len(clauses) not in _CLAUSE_COUNTS:
            return None
        return PluralDirective(param, tuple(clauses))

    @staticmethod
    def _closing_brace(text: str, pos: int) -> int:
        depth = 1
        for index in range(pos, len(text)):
            char = text[index]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return index
        return -1


def parse_template(
        value: LocaleValue,
        *,
        path: str = "<value>",
        max_length: int = DEFAULT_MAX_VALUE_LENGTH,
) -> ParsedTemplate:
    """Parse a locale value; values that are not strings have no parameters.

    Raises:
        LocaleValueTooLong: If the string is longer than ``max_length``
    """
    if not isinstance(value, str):
        return ParsedTemplate()
    if len(value) > max_length:
        raise LocaleValueTooLong(path, len(value), max_length)
    return TemplateParser.parse(value)


def parse_params(value: LocaleValue, *, max_length: int = DEFAULT_MAX_VALUE_LENGTH) -> list[str]:
    """Placeholder names of ``value`` in order of appearance."""
    return list(parse_template(value, max_length=max_length).params)


__all__ = [
    "DEFAULT_MAX_VALUE_LENGTH",
    "ParsedTemplate",
    "PluralClause",
    "PluralDirective",
    "TemplateParser",
    "parse_params",
    "parse_template",
]
