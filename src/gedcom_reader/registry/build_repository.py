from __future__ import annotations

from typing import Dict

from gedcom_reader.registry.build_common import new_address, record_handlers
from gedcom_reader.registry.utils import NodeKind, Table, append_value, open_single, set_value


REPOSITORY_TABLE: Table = {
    "NAME": set_value("name"),
    "ADDR": open_single("address", NodeKind.ADDRESS, new_address),
    "PHON": append_value("phones"),
    "EMAIL": append_value("emails"),
    "WWW": append_value("websites"),
    **record_handlers(),
}

TABLES: Dict[NodeKind, Table] = {
    NodeKind.REPOSITORY: REPOSITORY_TABLE,
}
