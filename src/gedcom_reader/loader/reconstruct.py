# src/gedcom_reader/loader/reconstruct.py

"""
Reconstruct multi-line GEDCOM values from CONC / CONT lines.

``merge_continuations`` takes the token stream produced by the tokenizer and
folds every CONC/CONT token into the value of the most recent
*non-CONC/CONT* token, by stream order rather than level arithmetic.

- CONC → concatenates directly (no separator)
- CONT → concatenates with a newline between lines

Continuation tokens disappear from the output. The function is a generator
and never mutates its input tokens (LineToken is frozen; merged tokens are
fresh copies).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Iterator, List, Optional

from gedcom_reader.logging import get_logger

from .tokenizer import LineToken

log = get_logger(__name__)

CONTINUATION_TAGS = frozenset({"CONC", "CONT"})


def _fold(base: LineToken, parts: List[str]) -> LineToken:
    if not parts:
        return base
    return replace(base, value="".join(parts))


def merge_continuations(tokens: Iterable[LineToken]) -> Iterator[LineToken]:
    """
    Yield an equivalent token stream with CONT/CONC folded in.

    Example:
        1 NOTE First line
        2 CONC  continued
        2 CONT next line

    becomes:
        1 NOTE "First line continued\\nnext line"

    A base token without a value counts as the empty string. A continuation
    that arrives before any other token has nothing to attach to and is
    dropped.
    """
    pending: Optional[LineToken] = None
    parts: List[str] = []

    for tok in tokens:
        if tok.tag in CONTINUATION_TAGS:
            if pending is None:
                log.debug("Line %d: %s with no preceding line, dropped", tok.lineno, tok.tag)
                continue

            if not parts:
                parts.append(pending.value or "")
            if tok.tag == "CONT":
                parts.append("\n")
            parts.append(tok.value or "")
            continue

        if pending is not None:
            yield _fold(pending, parts)

        pending = tok
        parts = []

    if pending is not None:
        yield _fold(pending, parts)


def reconstruct_values(tokens: Iterable[LineToken]) -> List[LineToken]:
    """Materialized convenience wrapper around merge_continuations()."""
    return list(merge_continuations(tokens))
