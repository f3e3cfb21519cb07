from __future__ import annotations

from typing import List, NamedTuple, Optional

from gedcom_reader.core.diagnostics import Diagnostic, DiagnosticLog
from gedcom_reader.core.exceptions import UnsupportedTag
from gedcom_reader.logging import get_logger
from gedcom_reader.registry.entities import RECORD_TYPES, GedcomData, Header, Record
from gedcom_reader.registry.link_entities import resolve_references
from gedcom_reader.registry.structures import GenericAttribute
from gedcom_reader.registry.symbols import SymbolTable

log = get_logger(__name__)


class ParseResult(NamedTuple):
    data: GedcomData
    diagnostics: List[Diagnostic]


class RecordAggregator:
    """
    Collects finished records into a GedcomData, in file order.

    Each record is also declared in the symbol table as it arrives;
    ``finish`` runs the cross-reference pass once the stream has ended.
    """

    def __init__(
        self,
        diagnostics: Optional[DiagnosticLog] = None,
        symbols: Optional[SymbolTable] = None,
    ) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()
        self.symbols = symbols if symbols is not None else SymbolTable(diagnostics=self.diagnostics)
        self.data = GedcomData()

    # ------------------------------------------------------------------ #
    # Collection
    # ------------------------------------------------------------------ #

    def add(self, record: Record) -> bool:
        """Store ``record``; returns False when it was rejected."""
        if isinstance(record, Header):
            if self.data.header is not None:
                self.diagnostics.record(
                    UnsupportedTag(
                        f"additional HEAD record ignored (first on line {self.data.header.lineno})",
                        record.lineno,
                    )
                )
                return False
            self.data.header = record
        else:
            _, attr = RECORD_TYPES[record.kind]
            getattr(self.data, attr).append(record)

        self.symbols.declare(record)
        return True

    def add_custom(self, data: GenericAttribute) -> None:
        self.data.custom_data.append(data)

    def add_skipped(self, data: GenericAttribute) -> None:
        self.data.skipped_records.append(data)

    def mark_trailer(self) -> None:
        self.data.trailer_seen = True

    # ------------------------------------------------------------------ #
    # Completion
    # ------------------------------------------------------------------ #

    def finish(self) -> ParseResult:
        resolve_references(self.data, self.symbols, self.diagnostics)
        log.debug("Aggregated records: %s", self.data.summary())
        return ParseResult(self.data, self.diagnostics.to_list())
