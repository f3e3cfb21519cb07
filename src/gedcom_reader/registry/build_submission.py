from __future__ import annotations

from typing import Dict

from gedcom_reader.registry.build_common import record_handlers
from gedcom_reader.registry.utils import NodeKind, Table, set_pointer, set_value


SUBMISSION_TABLE: Table = {
    "FAMF": set_value("name_of_family_file"),
    "TEMP": set_value("temple_code"),
    "SUBM": set_pointer("submitter"),
    "ANCE": set_value("generations_of_ancestors"),
    "DESC": set_value("generations_of_descendants"),
    "ORDI": set_value("ordinance_process_flag"),
    **record_handlers(),
}

TABLES: Dict[NodeKind, Table] = {
    NodeKind.SUBMISSION: SUBMISSION_TABLE,
}
