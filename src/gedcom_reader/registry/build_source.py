from __future__ import annotations

from typing import Dict, TYPE_CHECKING

from gedcom_reader.events.event import new_event
from gedcom_reader.registry.build_common import new_note, record_handlers
from gedcom_reader.registry.structures import RawPointer, RepoCitation, SourceData, is_pointer_value
from gedcom_reader.registry.utils import NodeKind, Table, open_many, open_single, set_value

if TYPE_CHECKING:
    from gedcom_reader.loader.tokenizer import LineToken


def new_repo_citation(token: LineToken) -> RepoCitation:
    # "1 REPO" with no pointer is legal in 5.5; CALN/NOTE may still follow
    if is_pointer_value(token.value):
        return RepoCitation(repository=RawPointer(token.value, token.lineno))
    return RepoCitation()


SOURCE_TABLE: Table = {
    "TITL": set_value("title"),
    "AUTH": set_value("author"),
    "ABBR": set_value("abbreviation"),
    "PUBL": set_value("publication"),
    "TEXT": set_value("text"),
    "DATA": open_single("data", NodeKind.SOURCE_DATA, lambda t: SourceData()),
    "REPO": open_many("repo_citations", NodeKind.REPO_CITATION, new_repo_citation),
    **record_handlers(multimedia=True),
}

SOURCE_DATA_TABLE: Table = {
    "EVEN": open_many("events", NodeKind.EVENT, lambda t: new_event("EVEN", t.value)),
    "AGNC": set_value("agency"),
    "NOTE": open_many("notes", NodeKind.NOTE, new_note),
}

REPO_CITATION_TABLE: Table = {
    "CALN": set_value("call_number"),
    "NOTE": open_many("notes", NodeKind.NOTE, new_note),
}

TABLES: Dict[NodeKind, Table] = {
    NodeKind.SOURCE: SOURCE_TABLE,
    NodeKind.SOURCE_DATA: SOURCE_DATA_TABLE,
    NodeKind.REPO_CITATION: REPO_CITATION_TABLE,
}
