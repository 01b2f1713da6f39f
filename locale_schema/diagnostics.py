"""Non-fatal findings reported while analyzing a locale dictionary."""

import logging
from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    AMBIGUOUS_SUFFIX_TOKEN = "ambiguous-suffix-token"
    MALFORMED_PLURAL_DIRECTIVE = "malformed-plural-directive"
    DUPLICATE_PARAMETER = "duplicate-parameter"
    EMPTY_PLACEHOLDER = "empty-placeholder"


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    path: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "path": self.path, "message": self.message}


class DiagnosticCollector:
    """
    Accumulates diagnostics for one analysis.

    Args:
        verbose: Log every diagnostic as a warning when it is reported
    """

    __slots__ = ("_items", "_verbose")

    def __init__(self, verbose: bool = False):
        self._items: list[Diagnostic] = []
        self._verbose = verbose

    def report(self, kind: DiagnosticKind, path: str, message: str) -> None:
        self._items.append(Diagnostic(kind, path, message))
        if self._verbose:
            logging.warning("%s at '%s': %s", kind.value, path, message)

    @property
    def items(self) -> tuple[Diagnostic, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["Diagnostic", "DiagnosticCollector", "DiagnosticKind"]
