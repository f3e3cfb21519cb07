# src/gedcom_reader/loader/segmenter.py

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from gedcom_reader.core.diagnostics import DiagnosticLog
from gedcom_reader.core.exceptions import LevelSkipError
from gedcom_reader.logging import get_logger
from gedcom_reader.registry.build_registry import RecordAggregator
from gedcom_reader.registry.dispatch import TagDispatcher
from gedcom_reader.registry.entities import Record
from gedcom_reader.registry.utils import NodeKind

from .tokenizer import LineToken
from .tree_builder import Node, NodeArena

log = get_logger(__name__)

_RECORD_KINDS = {
    NodeKind.HEADER,
    NodeKind.SUBMISSION,
    NodeKind.SUBMITTER,
    NodeKind.INDIVIDUAL,
    NodeKind.FAMILY,
    NodeKind.SOURCE,
    NodeKind.REPOSITORY,
    NodeKind.MULTIMEDIA,
    NodeKind.NOTE_RECORD,
}


class HierarchyBuilder:
    """
    Places a stream of (continuation-merged) tokens into the record hierarchy.

    Rules:
        - The stack holds arena indices of the open nodes, record first.
        - Before each token, every open node with level >= token.level is
          closed. Closing is a pop; nothing else happens to the node.
        - Level 0 finalizes the outgoing record and opens a new one.
        - A line must sit exactly one level below its parent. When it does
          not, a LevelSkipError is recorded and the line is attached to the
          nearest open ancestor instead.
        - A non-zero level with no record open is recorded once and its
          whole subtree is ignored.
    """

    def __init__(
        self,
        dispatcher: Optional[TagDispatcher] = None,
        aggregator: Optional[RecordAggregator] = None,
        diagnostics: Optional[DiagnosticLog] = None,
    ) -> None:
        if diagnostics is None:
            diagnostics = (
                aggregator.diagnostics if aggregator is not None
                else dispatcher.diagnostics if dispatcher is not None
                else DiagnosticLog()
            )
        self.diagnostics = diagnostics
        self.dispatcher = dispatcher or TagDispatcher(diagnostics)
        self.aggregator = aggregator or RecordAggregator(diagnostics)
        self.arena = NodeArena()

        self._stack: List[int] = []
        self._record: Optional[int] = None
        self._orphan_level: Optional[int] = None

    # ------------------------------------------------------------------ #
    # Stack helpers
    # ------------------------------------------------------------------ #

    def _close_to(self, level: int) -> None:
        while self._stack and self.arena[self._stack[-1]].level >= level:
            self._stack.pop()

    def _check_level(self, parent: Node, token: LineToken) -> None:
        if parent.level != token.level - 1:
            raise LevelSkipError(
                f"level {token.level} {token.tag} follows level {parent.level} {parent.tag}; "
                f"attached to {parent.tag} on line {parent.lineno}",
                token.lineno,
                fallback=parent.index,
            )

    def chain(self) -> List[Node]:
        """Open nodes from the record down to the innermost one."""
        return [self.arena[i] for i in self._stack]

    # ------------------------------------------------------------------ #
    # Records
    # ------------------------------------------------------------------ #

    def _finalize(self) -> Optional[Record]:
        if self._record is None:
            return None
        node = self.arena[self._record]
        self._record = None
        log.debug(
            "Closed %s on line %d with %d direct children",
            node.tag, node.lineno, len(self.arena.children_of(node.index)),
        )

        if node.kind in _RECORD_KINDS:
            self.aggregator.add(node.target)
            return node.target
        if node.kind is NodeKind.CUSTOM:
            self.aggregator.add_custom(node.target)
        elif node.kind is NodeKind.SKIPPED:
            self.aggregator.add_skipped(node.target)
        return None

    def _open(self, token: LineToken) -> None:
        result = self.dispatcher.open_record(token)
        index = self.arena.add(token, result.kind, result.target)
        self._stack = [index]
        self._record = index
        self._orphan_level = None
        if result.kind is NodeKind.TRAILER:
            self.aggregator.mark_trailer()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def feed(self, token: LineToken) -> Optional[Record]:
        """
        Place one token. Returns the record finalized by this token, if any.
        """
        self._close_to(token.level)

        if token.level == 0:
            finished = self._finalize()
            self._open(token)
            return finished

        if not self._stack:
            if self._orphan_level is None or token.level <= self._orphan_level:
                self._orphan_level = token.level
                self.diagnostics.record(
                    LevelSkipError(
                        f"level {token.level} {token.tag} appears outside any record; subtree ignored",
                        token.lineno,
                    )
                )
            return None

        parent = self.arena[self._stack[-1]]
        reattached = False
        try:
            self._check_level(parent, token)
        except LevelSkipError as exc:
            self.diagnostics.record(exc)
            parent = self.arena[exc.fallback]
            reattached = True

        result = self.dispatcher.dispatch(self.chain(), token)
        index = self.arena.add(token, result.kind, result.target, parent.index, reattached)
        self._stack.append(index)
        if reattached:
            log.debug("Line %d reattached under %s", token.lineno, self.arena.parent_of(index).tag)
        return None

    def finish(self) -> Optional[Record]:
        """Close everything still open; returns the last finalized record."""
        self._stack.clear()
        last = self._finalize()
        log.debug("Arena holds %d level-0 nodes out of %d", len(self.arena.records()), len(self.arena))
        return last

    def build(self, tokens: Iterable[LineToken]) -> Iterator[Record]:
        """Feed every token, yielding records as they are finalized."""
        for token in tokens:
            finished = self.feed(token)
            if finished is not None:
                yield finished
        last = self.finish()
        if last is not None:
            yield last
