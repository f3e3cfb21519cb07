from __future__ import annotations

from typing import Dict

from gedcom_reader.registry.build_common import record_handlers
from gedcom_reader.registry.structures import MultimediaFile, MultimediaFormat
from gedcom_reader.registry.utils import NodeKind, Table, open_many, open_single, set_value


# FORM and TITL appear under FILE in 5.5.1 and beside it in Ancestry.com
# exports; both placements are accepted.
MULTIMEDIA_TABLE: Table = {
    "FILE": open_many("files", NodeKind.MULTIMEDIA_FILE, lambda t: MultimediaFile(value=t.value)),
    "FORM": open_single("form", NodeKind.MULTIMEDIA_FORMAT, lambda t: MultimediaFormat(value=t.value)),
    "TITL": set_value("title"),
    **record_handlers(citations=True, refn=True),
}

TABLES: Dict[NodeKind, Table] = {
    NodeKind.MULTIMEDIA: MULTIMEDIA_TABLE,
}
