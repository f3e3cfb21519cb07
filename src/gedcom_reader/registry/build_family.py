from __future__ import annotations

from typing import Dict, TYPE_CHECKING

from gedcom_reader.core.exceptions import UnsupportedTag
from gedcom_reader.events.event import FAMILY_EVENT_TAGS, new_event
from gedcom_reader.registry.build_common import record_handlers
from gedcom_reader.registry.entities import Family
from gedcom_reader.registry.utils import (
    Dispatch,
    NodeKind,
    Table,
    append_pointer,
    set_pointer,
)

if TYPE_CHECKING:
    from gedcom_reader.loader.tokenizer import LineToken


def _open_event(family: Family, token: LineToken) -> Dispatch:
    event = new_event(token.tag, token.value)
    family.events.append(event)
    return Dispatch(NodeKind.EVENT, event)


def _set_num_children(family: Family, token: LineToken) -> None:
    try:
        family.num_children = int((token.value or "").strip())
    except ValueError:
        raise UnsupportedTag(f"NCHI is not a number: {token.value!r}", token.lineno) from None


# HUSB and WIFE are plain pointers; no gender checking is done. A second
# HUSB/WIFE line is rejected rather than overwriting the first.
FAMILY_TABLE: Table = {
    "HUSB": set_pointer("husband", once=True),
    "WIFE": set_pointer("wife", once=True),
    "CHIL": append_pointer("children"),
    "NCHI": _set_num_children,
    **{tag: _open_event for tag in FAMILY_EVENT_TAGS},
    **record_handlers(citations=True, multimedia=True, refn=True),
}

TABLES: Dict[NodeKind, Table] = {
    NodeKind.FAMILY: FAMILY_TABLE,
}
