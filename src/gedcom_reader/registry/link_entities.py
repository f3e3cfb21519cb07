from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any, Optional

from gedcom_reader.core.diagnostics import DiagnosticLog
from gedcom_reader.core.exceptions import DanglingReference
from gedcom_reader.logging import get_logger
from gedcom_reader.registry.entities import GedcomData, Record
from gedcom_reader.registry.structures import Pointer, RecordKind, XrefLink
from gedcom_reader.registry.symbols import SymbolTable

log = get_logger(__name__)


class _Resolver:
    def __init__(self, symbols: SymbolTable, diagnostics: DiagnosticLog) -> None:
        self.symbols = symbols
        self.diagnostics = diagnostics
        self.resolved = 0

    def resolve(self, raw: Optional[Pointer], expected: RecordKind, record: Record, name: str) -> Optional[Pointer]:
        if raw is None or isinstance(raw, XrefLink):
            return raw

        xref = raw.strip()
        lineno = getattr(raw, "lineno", 0) or record.lineno
        owner = f"{record.kind.value} {record.xref or '(no xref)'}"
        symbol = self.symbols.get(xref)
        if symbol is None:
            self.diagnostics.record(
                DanglingReference(f"{owner} {name} -> {xref} is not declared", lineno)
            )
            return raw
        if symbol.kind is not expected:
            self.diagnostics.record(
                DanglingReference(
                    f"{owner} {name} -> {xref} points to {symbol.kind.value}, expected {expected.value}",
                    lineno,
                )
            )
            return raw

        self.resolved += 1
        return XrefLink(expected, xref)

    def walk(self, obj: Any, record: Record) -> None:
        for f in fields(obj):
            value = getattr(obj, f.name)
            expected = f.metadata.get("pointer")

            if expected is not None:
                if isinstance(value, list):
                    for i, item in enumerate(value):
                        value[i] = self.resolve(item, expected, record, f.name)
                else:
                    setattr(obj, f.name, self.resolve(value, expected, record, f.name))
                continue

            if isinstance(value, list):
                for item in value:
                    if is_dataclass(item) and not isinstance(item, type):
                        self.walk(item, record)
            elif is_dataclass(value) and not isinstance(value, type):
                self.walk(value, record)


def resolve_references(
    data: GedcomData,
    symbols: SymbolTable,
    diagnostics: Optional[DiagnosticLog] = None,
) -> int:
    """
    Rewrite every raw '@id@' pointer in ``data`` into an XrefLink.

    A pointer to an undeclared id, or to a record of the wrong kind, keeps its
    raw string and produces a DanglingReference diagnostic carrying the line
    the pointer was read from (the holding record's line for pointers built
    outside a parse). Links resolved by an earlier pass are left
    untouched.

    Returns the number of pointers resolved by this call.
    """
    resolver = _Resolver(symbols, diagnostics if diagnostics is not None else DiagnosticLog())
    for record in data.iter_records():
        resolver.walk(record, record)
    log.debug("Resolved %d cross-references", resolver.resolved)
    return resolver.resolved
