# src/gedcom_reader/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from gedcom_reader.core.diagnostics import DiagnosticLog
from gedcom_reader.core.exceptions import MalformedLine

# CRLF, LF and lone CR all terminate a GEDCOM line.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_BOM = "\ufeff"


@dataclass(frozen=True, slots=True)
class LineToken:
    """
    A single GEDCOM line token.

    Attributes:
        level: Parsed GEDCOM level (0, 1, 2, ...).
        xref_id: Cross-reference id declared on the line, e.g. "@I1@", or None.
        tag: GEDCOM tag, e.g. "INDI", "NAME", "CONT", "_MYTAG".
        value: The line value verbatim, or None when the line carries none.
        lineno: 1-based line number in the original text.
        raw: The original line content without line terminators.
    """
    level: int
    xref_id: Optional[str]
    tag: str
    value: Optional[str] = None
    lineno: int = 0
    raw: str = ""

    @property
    def is_continuation(self) -> bool:
        return self.tag in ("CONT", "CONC")

    @property
    def is_custom(self) -> bool:
        return self.tag.startswith("_")


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def _split_field(rest: str):
    """Split off the next space-delimited field; tolerate repeated spaces."""
    head, sep, tail = rest.partition(" ")
    return head, tail.lstrip(" ") if sep else ""


def tokenize_line(line: str, lineno: int = 0) -> LineToken:
    """
    Parse a single GEDCOM line into a LineToken.

    Grammar:
        <level> [<xref>] <tag> [<value>]

    The level and tag are required. An xref is only recognised directly
    after the level and must be delimited by '@'. The value is everything
    after the single space following the tag and is kept verbatim, including
    any '@...@' substrings.

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 CONC , World"

    Raises:
        MalformedLine: when the level is not a non-negative integer or the
            tag is missing.
    """
    raw = _strip_eol(line)

    if lineno <= 1 and raw.startswith(_BOM):
        raw = raw.lstrip(_BOM)

    text = raw.lstrip()
    if not text:
        raise MalformedLine(f"empty line {lineno}", lineno)

    # --- 1. Level ---------------------------------------------------------
    level_str, rest = _split_field(text)
    if not (level_str.isascii() and level_str.isdigit()):
        raise MalformedLine(
            f"level is not a non-negative integer: {level_str!r} in {raw!r}", lineno
        )
    level = int(level_str)

    if not rest.strip():
        raise MalformedLine(f"missing tag after level: {raw!r}", lineno)

    # --- 2. Optional xref -------------------------------------------------
    xref_id: Optional[str] = None
    if rest.startswith("@"):
        candidate, after = _split_field(rest)
        if len(candidate) > 2 and candidate.endswith("@"):
            xref_id = candidate
            rest = after
            if not rest.strip():
                raise MalformedLine(f"xref {xref_id} present but tag missing: {raw!r}", lineno)

    # --- 3. Tag and value -------------------------------------------------
    tag, sep, value = rest.partition(" ")
    if not tag:
        raise MalformedLine(f"missing tag: {raw!r}", lineno)

    if not sep or not value.strip():
        value = None

    return LineToken(
        level=level,
        xref_id=xref_id,
        tag=tag.upper() if not tag.startswith("_") else tag,
        value=value,
        lineno=lineno,
        raw=raw,
    )


def iter_lines(text: str) -> Iterator[str]:
    """Yield physical lines of ``text`` without terminators."""
    if not text:
        return
    parts = _LINE_BREAK_RE.split(text)
    # A trailing terminator produces one empty tail element; drop it.
    if parts and parts[-1] == "":
        parts.pop()
    yield from parts


def tokenize_lines(
    lines: Iterable[str],
    diagnostics: Optional[DiagnosticLog] = None,
) -> Iterator[LineToken]:
    """
    Yield LineTokens for every non-blank line.

    Blank lines are skipped silently. A malformed line is skipped; when a
    DiagnosticLog is given the error is recorded there, otherwise it is
    raised to the caller.
    """
    for lineno, line in enumerate(lines, start=1):
        stripped = _strip_eol(line)
        if not stripped.strip() or stripped == _BOM:
            continue

        try:
            yield tokenize_line(stripped, lineno=lineno)
        except MalformedLine as exc:
            if diagnostics is None:
                raise
            diagnostics.record(exc)


def tokenize_text(text: str, diagnostics: Optional[DiagnosticLog] = None) -> Iterator[LineToken]:
    """Tokenize a whole GEDCOM document held in memory."""
    return tokenize_lines(iter_lines(text), diagnostics)
