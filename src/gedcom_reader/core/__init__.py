"""
Shared parse infrastructure: error taxonomy, diagnostics and per-run context.
"""

from gedcom_reader.core.context import ParseContext, ParsePolicy
from gedcom_reader.core.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog
from gedcom_reader.core.exceptions import (
    DanglingReference,
    DuplicateXrefId,
    GedcomError,
    GedcomFatalError,
    InvalidInputError,
    LevelSkipError,
    MalformedLine,
    MissingHeaderError,
    UnsupportedTag,
)

__all__ = [
    "ParseContext",
    "ParsePolicy",
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "DanglingReference",
    "DuplicateXrefId",
    "GedcomError",
    "GedcomFatalError",
    "InvalidInputError",
    "LevelSkipError",
    "MalformedLine",
    "MissingHeaderError",
    "UnsupportedTag",
]
