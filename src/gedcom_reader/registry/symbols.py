from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, NamedTuple, Optional

from gedcom_reader.core.context import DUPLICATE_XREF_POLICIES
from gedcom_reader.core.diagnostics import DiagnosticLog
from gedcom_reader.core.exceptions import DuplicateXrefId
from gedcom_reader.registry.entities import Record
from gedcom_reader.registry.structures import RecordKind


class Symbol(NamedTuple):
    kind: RecordKind
    record: Record
    lineno: int


@dataclass
class SymbolTable:
    """
    xref id -> declaring record, filled as each level-0 record closes.

    On a duplicate id both declarations are reported; ``policy`` decides
    which one stays bound ("last" rebinds, "first" keeps the original).
    """

    policy: str = "last"
    diagnostics: Optional[DiagnosticLog] = None

    def __post_init__(self) -> None:
        if self.policy not in DUPLICATE_XREF_POLICIES:
            raise ValueError(f"unknown duplicate_xref policy {self.policy!r}")
        if self.diagnostics is None:
            self.diagnostics = DiagnosticLog()
        self._symbols: Dict[str, Symbol] = {}
        self._reported: set[str] = set()

    def declare(self, record: Record) -> bool:
        """
        Bind ``record.xref``. Returns True when the record is now the bound
        declaration for its id.
        """
        xref = record.xref
        if not xref:
            return False

        symbol = Symbol(record.kind, record, record.lineno)
        existing = self._symbols.get(xref)
        if existing is None:
            self._symbols[xref] = symbol
            return True

        if xref not in self._reported:
            self._reported.add(xref)
            self.diagnostics.record(
                DuplicateXrefId(
                    f"{xref} declared more than once (first on line {existing.lineno})",
                    existing.lineno,
                )
            )
        self.diagnostics.record(
            DuplicateXrefId(
                f"{xref} redeclared as {record.kind.value}; keeping the {self.policy} declaration",
                record.lineno,
            )
        )
        if self.policy == "last":
            self._symbols[xref] = symbol
            return True
        return False

    def get(self, xref: str) -> Optional[Symbol]:
        return self._symbols.get(xref)

    def kind_of(self, xref: str) -> Optional[RecordKind]:
        symbol = self._symbols.get(xref)
        return None if symbol is None else symbol.kind

    def by_kind(self, kind: RecordKind) -> Dict[str, Record]:
        return {x: s.record for x, s in self._symbols.items() if s.kind is kind}

    def __contains__(self, xref: object) -> bool:
        return xref in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)
