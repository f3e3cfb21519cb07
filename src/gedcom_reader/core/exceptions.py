from __future__ import annotations

from typing import Optional

from gedcom_reader.core.diagnostics import Diagnostic, DiagnosticKind


class GedcomError(Exception):
    """Base class for recoverable, line-attributed parse problems."""

    kind: DiagnosticKind

    def __init__(self, message: str, lineno: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.lineno = lineno

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(kind=self.kind, line_number=self.lineno, message=self.message)


class MalformedLine(GedcomError, ValueError):
    """Raised when a GEDCOM line cannot be split into level/xref/tag/value."""

    kind = DiagnosticKind.MALFORMED_LINE


class LevelSkipError(GedcomError):
    """
    Raised when a line's level exceeds its parent's level + 1.

    ``fallback`` is the arena index of the nearest open ancestor the line is
    reattached to, or None when no record is open at all.
    """

    kind = DiagnosticKind.LEVEL_SKIP

    def __init__(self, message: str, lineno: int = 0, fallback: Optional[int] = None) -> None:
        super().__init__(message, lineno)
        self.fallback = fallback


class UnsupportedTag(GedcomError):
    kind = DiagnosticKind.UNSUPPORTED_TAG


class DanglingReference(GedcomError):
    kind = DiagnosticKind.DANGLING_REFERENCE


class DuplicateXrefId(GedcomError):
    kind = DiagnosticKind.DUPLICATE_XREF


class GedcomFatalError(Exception):
    """Raised when the input cannot produce a usable token stream."""


class InvalidInputError(GedcomFatalError, TypeError):
    """Raised when parse() is handed something other than text."""


class MissingHeaderError(GedcomFatalError):
    """Raised when the parse policy mandates a HEAD record and none was found."""
