from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from gedcom_reader.core.exceptions import UnsupportedTag
from gedcom_reader.registry.structures import RawPointer, is_pointer_value

if TYPE_CHECKING:
    from gedcom_reader.loader.tokenizer import LineToken


class NodeKind(Enum):
    """What a node in the arena stands for; selects its dispatch table."""

    # records
    HEADER = auto()
    SUBMISSION = auto()
    SUBMITTER = auto()
    INDIVIDUAL = auto()
    FAMILY = auto()
    SOURCE = auto()
    REPOSITORY = auto()
    MULTIMEDIA = auto()
    NOTE_RECORD = auto()

    # header sub-structures
    ENCODING = auto()
    GEDCOM_META = auto()
    HEADER_SOURCE = auto()
    HEADER_SOURCE_DATA = auto()
    HEADER_PLACE = auto()
    CORPORATION = auto()

    # shared sub-structures
    ADDRESS = auto()
    DATE = auto()
    CHANGE_DATE = auto()
    NOTE = auto()
    TRANSLATION = auto()
    SOURCE_CITATION = auto()
    CITATION_DATA = auto()
    MULTIMEDIA_LINK = auto()
    MULTIMEDIA_FILE = auto()
    MULTIMEDIA_FORMAT = auto()
    USER_REFERENCE = auto()
    PLACE = auto()
    EVENT = auto()
    NAME = auto()
    FAMILY_LINK = auto()
    REPO_CITATION = auto()
    SOURCE_DATA = auto()

    # generic
    LEAF = auto()       # value-only line; any child is unsupported
    SKIPPED = auto()    # unsupported subtree, captured verbatim
    CUSTOM = auto()     # user-defined _TAG subtree, captured verbatim
    TRAILER = auto()    # 0 TRLR


@dataclass(frozen=True, slots=True)
class Dispatch:
    """Node the stack builder pushes for the line just dispatched."""
    kind: NodeKind
    target: Any = None


LEAF = Dispatch(NodeKind.LEAF)

# handler(current target, token) -> child to push, or None for a leaf
Handler = Callable[[Any, "LineToken"], Optional[Dispatch]]
Table = Dict[str, Handler]


# ----------------------------------------------------------------------
# Token helpers
# ----------------------------------------------------------------------

def pointer_value(token: LineToken) -> RawPointer:
    """Return the raw '@id@' a pointer line carries, or reject the line."""
    value = (token.value or "").strip()
    if not is_pointer_value(value):
        raise UnsupportedTag(
            f"{token.tag} expects a cross-reference pointer, got {token.value!r}",
            token.lineno,
        )
    return RawPointer(value, token.lineno)


# ----------------------------------------------------------------------
# Handler factories
# ----------------------------------------------------------------------

def set_value(attr: str, convert: Optional[Callable[[Optional[str]], Any]] = None) -> Handler:
    """Leaf handler storing the line value on ``target.<attr>``."""
    def handler(target: Any, token: LineToken) -> None:
        setattr(target, attr, token.value if convert is None else convert(token.value))
    return handler


def append_value(attr: str) -> Handler:
    """Leaf handler appending the line value to the list ``target.<attr>``."""
    def handler(target: Any, token: LineToken) -> None:
        if token.value is not None:
            getattr(target, attr).append(token.value)
    return handler


def set_pointer(attr: str, *, once: bool = False) -> Handler:
    """
    Leaf handler storing a raw pointer. With ``once`` a second occurrence is
    rejected instead of overwriting the first.
    """
    def handler(target: Any, token: LineToken) -> None:
        value = pointer_value(token)
        if once and getattr(target, attr) is not None:
            raise UnsupportedTag(
                f"second {token.tag} line ignored; already {getattr(target, attr)}",
                token.lineno,
            )
        setattr(target, attr, value)
    return handler


def append_pointer(attr: str) -> Handler:
    def handler(target: Any, token: LineToken) -> None:
        getattr(target, attr).append(pointer_value(token))
    return handler


def open_single(attr: str, kind: NodeKind, factory: Callable[["LineToken"], Any]) -> Handler:
    """Create a sub-structure, assign it to ``target.<attr>`` and descend into it."""
    def handler(target: Any, token: LineToken) -> Dispatch:
        child = factory(token)
        setattr(target, attr, child)
        return Dispatch(kind, child)
    return handler


def open_many(attr: str, kind: NodeKind, factory: Callable[["LineToken"], Any]) -> Handler:
    """Create a sub-structure, append it to ``target.<attr>`` and descend into it."""
    def handler(target: Any, token: LineToken) -> Dispatch:
        child = factory(token)
        getattr(target, attr).append(child)
        return Dispatch(kind, child)
    return handler


def descend(kind: NodeKind) -> Handler:
    """Descend without creating anything: children keep populating ``target``."""
    def handler(target: Any, token: LineToken) -> Dispatch:
        return Dispatch(kind, target)
    return handler
