from __future__ import annotations

from typing import Dict

from gedcom_reader.registry.build_common import record_handlers
from gedcom_reader.registry.utils import NodeKind, Table


# The record text comes from the level-0 line itself (``0 @N1@ NOTE text``)
# plus any CONT/CONC lines already folded into it.
NOTE_RECORD_TABLE: Table = {
    **record_handlers(notes=False, citations=True, refn=True),
}

TABLES: Dict[NodeKind, Table] = {
    NodeKind.NOTE_RECORD: NOTE_RECORD_TABLE,
}
