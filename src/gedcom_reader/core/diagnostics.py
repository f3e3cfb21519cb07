"""
Diagnostics accumulated over a single parse.

Per-line problems never abort a parse. The component that owns the recovery
policy catches the error and hands it to ``DiagnosticLog.record``; the caller
receives the full list alongside the best-effort data model.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, TYPE_CHECKING

from gedcom_reader.logging import get_logger

if TYPE_CHECKING:
    from gedcom_reader.core.exceptions import GedcomError

log = get_logger(__name__)


class DiagnosticKind(str, Enum):
    MALFORMED_LINE = "MalformedLine"
    LEVEL_SKIP = "LevelSkipError"
    UNSUPPORTED_TAG = "UnsupportedTag"
    DANGLING_REFERENCE = "DanglingReference"
    DUPLICATE_XREF = "DuplicateXrefId"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    kind: DiagnosticKind
    line_number: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: [{self.kind.value}] {self.message}"


class DiagnosticLog:
    """Ordered, append-only collection of diagnostics."""

    def __init__(self) -> None:
        self._items: List[Diagnostic] = []

    def record(self, error: "GedcomError") -> Diagnostic:
        diag = error.to_diagnostic()
        self._items.append(diag)
        log.debug("%s", diag)
        return diag

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self._items if d.kind is kind]

    def first(self, kind: Optional[DiagnosticKind] = None) -> Optional[Diagnostic]:
        for d in self._items:
            if kind is None or d.kind is kind:
                return d
        return None

    def to_list(self) -> List[Diagnostic]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<DiagnosticLog items={len(self._items)}>"
