"""
Tag dispatch.

Given the chain of open nodes (record first, innermost last) and the next
token, decide what the token populates and which node, if any, the stack
builder pushes for it. Tables are keyed by the innermost node's kind, so the
same tag can mean different things in different places (TITL on an INDI is a
nobility title, on a SOUR it is the source title).
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple, TYPE_CHECKING

from gedcom_reader.core.diagnostics import DiagnosticLog
from gedcom_reader.core.exceptions import UnsupportedTag
from gedcom_reader.logging import get_logger
from gedcom_reader.registry import (
    build_family,
    build_header,
    build_individual,
    build_media_object,
    build_note,
    build_repository,
    build_source,
    build_submission,
    build_submitter,
)
from gedcom_reader.registry.build_common import SHARED_TABLES
from gedcom_reader.registry.entities import (
    Family,
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
from gedcom_reader.registry.structures import GenericAttribute
from gedcom_reader.registry.utils import LEAF, Dispatch, NodeKind, Table

if TYPE_CHECKING:
    from gedcom_reader.loader.tokenizer import LineToken
    from gedcom_reader.loader.tree_builder import Node

log = get_logger(__name__)


DISPATCH_TABLES: Dict[NodeKind, Table] = {
    **SHARED_TABLES,
    **build_header.TABLES,
    **build_submission.TABLES,
    **build_submitter.TABLES,
    **build_individual.TABLES,
    **build_family.TABLES,
    **build_source.TABLES,
    **build_repository.TABLES,
    **build_media_object.TABLES,
    **build_note.TABLES,
}

# level-0 tag -> (node kind, record class)
RECORD_OPENERS: Dict[str, Tuple[NodeKind, type]] = {
    "HEAD": (NodeKind.HEADER, Header),
    "SUBN": (NodeKind.SUBMISSION, Submission),
    "SUBM": (NodeKind.SUBMITTER, Submitter),
    "INDI": (NodeKind.INDIVIDUAL, Individual),
    "FAM": (NodeKind.FAMILY, Family),
    "SOUR": (NodeKind.SOURCE, Source),
    "REPO": (NodeKind.REPOSITORY, Repository),
    "OBJE": (NodeKind.MULTIMEDIA, Multimedia),
    "NOTE": (NodeKind.NOTE_RECORD, NoteRecord),
}

_CAPTURE_KINDS = (NodeKind.SKIPPED, NodeKind.CUSTOM)


def _capture(token: LineToken) -> GenericAttribute:
    return GenericAttribute(
        tag=token.tag,
        value=token.value,
        xref_id=token.xref_id,
        lineno=token.lineno,
    )


def _path(chain: Sequence["Node"], token: LineToken) -> str:
    return ".".join([n.tag for n in chain] + [token.tag])


class TagDispatcher:
    """
    Routes tokens to the handler tables.

    Unsupported lines are reported to the diagnostic log here, since this is
    where the decision to skip them is made.
    """

    def __init__(self, diagnostics: Optional[DiagnosticLog] = None) -> None:
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticLog()

    # ------------------------------------------------------------------ #
    # Level 0
    # ------------------------------------------------------------------ #

    def open_record(self, token: LineToken) -> Dispatch:
        """Start a new top-level record for a level-0 token."""
        opener = RECORD_OPENERS.get(token.tag)
        if opener is not None:
            kind, cls = opener
            record: Record = cls(xref=token.xref_id, lineno=token.lineno)
            if isinstance(record, NoteRecord):
                record.value = token.value
            return Dispatch(kind, record)

        if token.tag == "TRLR":
            return Dispatch(NodeKind.TRAILER)

        if token.is_custom:
            return Dispatch(NodeKind.CUSTOM, _capture(token))

        self.diagnostics.record(
            UnsupportedTag(f"unsupported record type {token.tag}", token.lineno)
        )
        return Dispatch(NodeKind.SKIPPED, _capture(token))

    # ------------------------------------------------------------------ #
    # Level > 0
    # ------------------------------------------------------------------ #

    def dispatch(self, chain: Sequence["Node"], token: LineToken) -> Dispatch:
        """
        Handle ``token`` as a child of ``chain[-1]``.

        Returns the node to push: a sub-structure, a capture node for custom
        or skipped subtrees, or LEAF for value-only lines.
        """
        current = chain[-1]

        # anything under a captured subtree stays in that subtree
        if current.kind in _CAPTURE_KINDS:
            child = _capture(token)
            current.target.children.append(child)
            return Dispatch(current.kind, child)

        if token.is_custom:
            return self._custom(chain, token)

        handler = DISPATCH_TABLES.get(current.kind, {}).get(token.tag)
        if handler is None:
            return self._skip(chain, token, f"unsupported tag {_path(chain, token)}")

        try:
            result = handler(current.target, token)
        except UnsupportedTag as exc:
            return self._skip(chain, token, f"{_path(chain, token)}: {exc.message}")
        return result if result is not None else LEAF

    # ------------------------------------------------------------------ #
    # Captures
    # ------------------------------------------------------------------ #

    def _custom(self, chain: Sequence["Node"], token: LineToken) -> Dispatch:
        data = _capture(token)
        for node in reversed(chain):
            holder = getattr(node.target, "custom_data", None)
            if isinstance(holder, list):
                holder.append(data)
                break
        else:
            log.debug("No holder for custom tag %s on line %d", token.tag, token.lineno)
        return Dispatch(NodeKind.CUSTOM, data)

    def _skip(self, chain: Sequence["Node"], token: LineToken, message: str) -> Dispatch:
        skipped = _capture(token)
        holder = getattr(chain[0].target, "skipped_tags", None)
        if isinstance(holder, list):
            holder.append(skipped)
        self.diagnostics.record(UnsupportedTag(message, token.lineno))
        return Dispatch(NodeKind.SKIPPED, skipped)


def dispatch(
    chain: Sequence["Node"],
    token: LineToken,
    diagnostics: Optional[DiagnosticLog] = None,
) -> Dispatch:
    """Functional shortcut around TagDispatcher.dispatch."""
    return TagDispatcher(diagnostics).dispatch(chain, token)
