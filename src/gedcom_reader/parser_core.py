"""
parser_core.py
Central parsing engine with full logging integration.

    text -> tokenize -> merge continuations -> hierarchy builder (dispatch per
    token) -> cross-reference pass -> ParseResult(data, diagnostics)
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from gedcom_reader.config import get_config
from gedcom_reader.core.context import ParseContext, ParsePolicy
from gedcom_reader.core.exceptions import InvalidInputError, MissingHeaderError
from gedcom_reader.loader.file_loader import PathLike, load_file
from gedcom_reader.loader.reconstruct import merge_continuations
from gedcom_reader.loader.segmenter import HierarchyBuilder
from gedcom_reader.loader.tokenizer import tokenize_text
from gedcom_reader.logging import get_logger
from gedcom_reader.registry.build_registry import ParseResult, RecordAggregator
from gedcom_reader.registry.entities import Record
from gedcom_reader.registry.symbols import SymbolTable

log = get_logger(__name__)


def _require_text(text: Any) -> str:
    if not isinstance(text, str):
        raise InvalidInputError(
            f"GEDCOM input must be str, got {type(text).__name__}; decode bytes first"
        )
    return text


def _builder(ctx: ParseContext) -> HierarchyBuilder:
    symbols = SymbolTable(policy=ctx.policy.duplicate_xref, diagnostics=ctx.diagnostics)
    aggregator = RecordAggregator(ctx.diagnostics, symbols)
    return HierarchyBuilder(aggregator=aggregator, diagnostics=ctx.diagnostics)


def parse(text: str, policy: Optional[ParsePolicy] = None) -> ParseResult:
    """
    Parse a GEDCOM document held in memory.

    Per-line problems never abort the parse; they are returned as
    diagnostics next to the best-effort data model.

    Raises:
        InvalidInputError: ``text`` is not a str.
        MissingHeaderError: the policy requires a HEAD record and none was parsed.
    """
    text = _require_text(text)
    ctx = ParseContext(policy=policy or ParsePolicy())

    builder = _builder(ctx)
    for _ in builder.build(merge_continuations(tokenize_text(text, ctx.diagnostics))):
        pass

    result = builder.aggregator.finish()

    if ctx.policy.require_header and result.data.header is None:
        raise MissingHeaderError("no HEAD record found")

    log.debug(
        "Parsed %d nodes into %s with %d diagnostics",
        len(builder.arena),
        result.data.summary(),
        len(result.diagnostics),
    )
    return result


def iter_records(text: str) -> Iterator[Record]:
    """
    Lazily yield each top-level record as soon as it is complete.

    Cross-references are NOT resolved; pointers keep their raw '@id@' form.
    Each call starts a fresh parse.
    """
    text = _require_text(text)
    builder = _builder(ParseContext())
    yield from builder.build(merge_continuations(tokenize_text(text, builder.diagnostics)))


class GEDCOMParser:
    """
    High-level parser:
      - loads file
      - parses it under the configured policy
      - logs a summary
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.policy = ParsePolicy.from_config(self.cfg)
        self.log = get_logger(__name__)

        self.text: Optional[str] = None
        self.result: Optional[ParseResult] = None

        self.log.debug("Parser engine initialized (policy=%s).", self.policy)

    # ---------------------------------------------------------
    # Load file
    # ---------------------------------------------------------
    def load_file(self, path: PathLike) -> str:
        """Read GEDCOM input from ``path``."""
        self.log.info("Reading GEDCOM input: %s", path)
        self.text = load_file(path)
        return self.text

    # ---------------------------------------------------------
    # Full run
    # ---------------------------------------------------------
    def run(self, input_path: PathLike) -> ParseResult:
        """
        Full parse sequence.
        Returns: ParseResult(data, diagnostics)
        """
        self.load_file(input_path)

        self.log.info("Running parser engine...")
        self.result = parse(self.text, self.policy)

        self.log.info(
            "Parser run completed: %s, %d diagnostics",
            self.result.data.summary(),
            len(self.result.diagnostics),
        )
        if self.cfg.debug:
            for diag in self.result.diagnostics:
                self.log.debug("%s", diag)
        return self.result
