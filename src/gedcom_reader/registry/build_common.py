"""
Dispatch tables for sub-structures shared by several record kinds.

Each table maps a tag to a handler ``(target, token) -> Dispatch | None``;
``record_handlers`` assembles the NOTE/SOUR/OBJE/REFN/RIN/CHAN lines most
records accept so the per-record tables only list what is particular to them.
"""

from __future__ import annotations

from typing import Dict, TYPE_CHECKING

from gedcom_reader.registry.structures import (
    Address,
    ChangeDate,
    CitationData,
    DateValue,
    MultimediaFile,
    MultimediaFormat,
    MultimediaLink,
    NoteStructure,
    Place,
    RawPointer,
    SourceCitation,
    Translation,
    UserReferenceNumber,
    is_pointer_value,
)
from gedcom_reader.registry.utils import (
    NodeKind,
    Table,
    open_many,
    open_single,
    set_value,
)

if TYPE_CHECKING:
    from gedcom_reader.loader.tokenizer import LineToken


# ----------------------------------------------------------------------
# Factories
# ----------------------------------------------------------------------

def new_note(token: LineToken) -> NoteStructure:
    if is_pointer_value(token.value):
        return NoteStructure(note=RawPointer(token.value, token.lineno))
    return NoteStructure(value=token.value)


def new_citation(token: LineToken) -> SourceCitation:
    if is_pointer_value(token.value):
        return SourceCitation(source=RawPointer(token.value, token.lineno))
    return SourceCitation(description=token.value)


def new_multimedia_link(token: LineToken) -> MultimediaLink:
    if is_pointer_value(token.value):
        return MultimediaLink(multimedia=RawPointer(token.value, token.lineno))
    return MultimediaLink()


def new_date(token: LineToken) -> DateValue:
    return DateValue(value=token.value)


def new_address(token: LineToken) -> Address:
    return Address(value=token.value)


# ----------------------------------------------------------------------
# Tables
# ----------------------------------------------------------------------

ADDRESS_TABLE: Table = {
    "ADR1": set_value("adr1"),
    "ADR2": set_value("adr2"),
    "ADR3": set_value("adr3"),
    "CITY": set_value("city"),
    "STAE": set_value("state"),
    "POST": set_value("post"),
    "CTRY": set_value("country"),
}

DATE_TABLE: Table = {
    "TIME": set_value("time"),
}

TRANSLATION_TABLE: Table = {
    "MIME": set_value("mime"),
    "LANG": set_value("language"),
}

NOTE_TABLE: Table = {
    "MIME": set_value("mime"),
    "LANG": set_value("language"),
    "TRAN": open_single("translation", NodeKind.TRANSLATION, lambda t: Translation(value=t.value)),
    "SOUR": open_many("source_citations", NodeKind.SOURCE_CITATION, new_citation),
}

CHANGE_DATE_TABLE: Table = {
    "DATE": open_single("date", NodeKind.DATE, new_date),
    "NOTE": open_many("notes", NodeKind.NOTE, new_note),
}

CITATION_DATA_TABLE: Table = {
    "DATE": set_value("date"),
    "TEXT": set_value("text"),
}

SOURCE_CITATION_TABLE: Table = {
    "PAGE": set_value("page"),
    "TEXT": set_value("text"),
    "QUAY": set_value("quality"),
    "DATA": open_single("data", NodeKind.CITATION_DATA, lambda t: CitationData()),
    "NOTE": open_many("notes", NodeKind.NOTE, new_note),
}

MULTIMEDIA_FORMAT_TABLE: Table = {
    "TYPE": set_value("source_media_type"),
    "MEDI": set_value("source_media_type"),
}

MULTIMEDIA_FILE_TABLE: Table = {
    "TITL": set_value("title"),
    "FORM": open_single("form", NodeKind.MULTIMEDIA_FORMAT, lambda t: MultimediaFormat(value=t.value)),
}

MULTIMEDIA_LINK_TABLE: Table = {
    "FILE": open_single("file", NodeKind.MULTIMEDIA_FILE, lambda t: MultimediaFile(value=t.value)),
    "FORM": open_single("form", NodeKind.MULTIMEDIA_FORMAT, lambda t: MultimediaFormat(value=t.value)),
    "TITL": set_value("title"),
}

USER_REFERENCE_TABLE: Table = {
    "TYPE": set_value("type"),
}

PLACE_TABLE: Table = {
    "FORM": set_value("form"),
}

EVENT_TABLE: Table = {
    "DATE": open_single("date", NodeKind.DATE, new_date),
    "PLAC": open_single("place", NodeKind.PLACE, lambda t: Place(value=t.value)),
    "TYPE": set_value("type"),
    "AGE": set_value("age"),
    "CAUS": set_value("cause"),
    "AGNC": set_value("agency"),
    "ADDR": open_single("address", NodeKind.ADDRESS, new_address),
    "NOTE": open_many("notes", NodeKind.NOTE, new_note),
    "SOUR": open_many("source_citations", NodeKind.SOURCE_CITATION, new_citation),
    "OBJE": open_many("multimedia", NodeKind.MULTIMEDIA_LINK, new_multimedia_link),
}


def record_handlers(
    *,
    notes: bool = True,
    citations: bool = False,
    multimedia: bool = False,
    refn: bool = False,
    rin: bool = True,
    chan: bool = True,
) -> Table:
    """Handlers for the lines most record kinds share."""
    table: Table = {}
    if notes:
        table["NOTE"] = open_many("notes", NodeKind.NOTE, new_note)
    if citations:
        table["SOUR"] = open_many("source_citations", NodeKind.SOURCE_CITATION, new_citation)
    if multimedia:
        table["OBJE"] = open_many("multimedia", NodeKind.MULTIMEDIA_LINK, new_multimedia_link)
    if refn:
        table["REFN"] = open_many(
            "user_reference_numbers",
            NodeKind.USER_REFERENCE,
            lambda t: UserReferenceNumber(value=t.value),
        )
    if rin:
        table["RIN"] = set_value("automated_record_id")
    if chan:
        table["CHAN"] = open_single("change_date", NodeKind.CHANGE_DATE, lambda t: ChangeDate())
    return table


SHARED_TABLES: Dict[NodeKind, Table] = {
    NodeKind.ADDRESS: ADDRESS_TABLE,
    NodeKind.DATE: DATE_TABLE,
    NodeKind.TRANSLATION: TRANSLATION_TABLE,
    NodeKind.NOTE: NOTE_TABLE,
    NodeKind.CHANGE_DATE: CHANGE_DATE_TABLE,
    NodeKind.CITATION_DATA: CITATION_DATA_TABLE,
    NodeKind.SOURCE_CITATION: SOURCE_CITATION_TABLE,
    NodeKind.MULTIMEDIA_FORMAT: MULTIMEDIA_FORMAT_TABLE,
    NodeKind.MULTIMEDIA_FILE: MULTIMEDIA_FILE_TABLE,
    NodeKind.MULTIMEDIA_LINK: MULTIMEDIA_LINK_TABLE,
    NodeKind.USER_REFERENCE: USER_REFERENCE_TABLE,
    NodeKind.PLACE: PLACE_TABLE,
    NodeKind.EVENT: EVENT_TABLE,
}
