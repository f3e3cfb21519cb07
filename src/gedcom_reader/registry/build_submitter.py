from __future__ import annotations

from typing import Dict

from gedcom_reader.registry.build_common import new_address, record_handlers
from gedcom_reader.registry.utils import NodeKind, Table, append_value, open_single, set_value


SUBMITTER_TABLE: Table = {
    "NAME": set_value("name"),
    "ADDR": open_single("address", NodeKind.ADDRESS, new_address),
    "PHON": append_value("phones"),
    "EMAIL": append_value("emails"),
    "FAX": append_value("faxes"),
    "WWW": append_value("websites"),
    "LANG": set_value("language"),
    **record_handlers(multimedia=True),
}

TABLES: Dict[NodeKind, Table] = {
    NodeKind.SUBMITTER: SUBMITTER_TABLE,
}
