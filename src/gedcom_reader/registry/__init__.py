from __future__ import annotations

# The dispatcher and its build_* tables import the event vocabulary, which in
# turn imports this package; they are imported from their modules directly.
from .build_registry import ParseResult, RecordAggregator
from .entities import (
    RECORD_TYPES,
    Family,
    GedcomData,
    Header,
    Individual,
    Multimedia,
    NoteRecord,
    Record,
    Repository,
    Source,
    Submission,
    Submitter,
)
from .link_entities import resolve_references
from .structures import GenericAttribute, RecordKind, XrefLink
from .symbols import Symbol, SymbolTable

__all__ = [
    "RECORD_TYPES",
    "Family",
    "GedcomData",
    "GenericAttribute",
    "Header",
    "Individual",
    "Multimedia",
    "NoteRecord",
    "ParseResult",
    "Record",
    "RecordAggregator",
    "RecordKind",
    "Repository",
    "Source",
    "Submission",
    "Submitter",
    "Symbol",
    "SymbolTable",
    "XrefLink",
    "resolve_references",
]
