from __future__ import annotations

from typing import Dict, List, Optional, TYPE_CHECKING

from gedcom_reader.registry.build_common import new_address, new_date
from gedcom_reader.registry.entities import Header
from gedcom_reader.registry.structures import (
    Corporation,
    Encoding,
    GedcomMeta,
    HeaderSource,
    HeaderSourceData,
)
from gedcom_reader.registry.utils import (
    NodeKind,
    Table,
    append_value,
    descend,
    open_single,
    set_pointer,
    set_value,
)

if TYPE_CHECKING:
    from gedcom_reader.loader.tokenizer import LineToken


def split_place_form(value: Optional[str]) -> List[str]:
    """'City, County, State' -> ['City', 'County', 'State']."""
    if not value:
        return []
    return [part.strip() for part in value.split(",")]


def _set_place_form(header: Header, token: LineToken) -> None:
    header.place_form = split_place_form(token.value)


HEADER_TABLE: Table = {
    "CHAR": open_single("encoding", NodeKind.ENCODING, lambda t: Encoding(value=t.value)),
    "COPR": set_value("copyright"),
    "DATE": open_single("date", NodeKind.DATE, new_date),
    "DEST": append_value("destinations"),
    "GEDC": open_single("gedcom", NodeKind.GEDCOM_META, lambda t: GedcomMeta()),
    "LANG": set_value("language"),
    "FILE": set_value("filename"),
    "NOTE": set_value("note"),
    "SOUR": open_single("source", NodeKind.HEADER_SOURCE, lambda t: HeaderSource(value=t.value)),
    "SUBM": set_pointer("submitter"),
    "SUBN": set_pointer("submission"),
    # PLAC carries no value of its own; FORM below it lands on the header
    "PLAC": descend(NodeKind.HEADER_PLACE),
}

ENCODING_TABLE: Table = {
    "VERS": set_value("version"),
}

GEDCOM_META_TABLE: Table = {
    "VERS": set_value("version"),
    "FORM": set_value("form"),
}

HEADER_PLACE_TABLE: Table = {
    "FORM": _set_place_form,
}

HEADER_SOURCE_TABLE: Table = {
    "VERS": set_value("version"),
    "NAME": set_value("name"),
    "CORP": open_single("corporation", NodeKind.CORPORATION, lambda t: Corporation(value=t.value)),
    "DATA": open_single("data", NodeKind.HEADER_SOURCE_DATA, lambda t: HeaderSourceData(value=t.value)),
}

CORPORATION_TABLE: Table = {
    "ADDR": open_single("address", NodeKind.ADDRESS, new_address),
    "PHON": append_value("phones"),
    "EMAIL": append_value("emails"),
    "FAX": append_value("faxes"),
    "WWW": append_value("websites"),
}

HEADER_SOURCE_DATA_TABLE: Table = {
    "DATE": open_single("date", NodeKind.DATE, new_date),
    "COPR": set_value("copyright"),
}


TABLES: Dict[NodeKind, Table] = {
    NodeKind.HEADER: HEADER_TABLE,
    NodeKind.ENCODING: ENCODING_TABLE,
    NodeKind.GEDCOM_META: GEDCOM_META_TABLE,
    NodeKind.HEADER_PLACE: HEADER_PLACE_TABLE,
    NodeKind.HEADER_SOURCE: HEADER_SOURCE_TABLE,
    NodeKind.CORPORATION: CORPORATION_TABLE,
    NodeKind.HEADER_SOURCE_DATA: HEADER_SOURCE_DATA_TABLE,
}
