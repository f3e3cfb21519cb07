from __future__ import annotations

from typing import Dict, TYPE_CHECKING

from gedcom_reader.events.event import (
    INDIVIDUAL_ATTRIBUTE_TAGS,
    INDIVIDUAL_EVENT_TAGS,
    new_event,
)
from gedcom_reader.registry.build_common import new_citation, new_note, record_handlers
from gedcom_reader.registry.entities import Individual
from gedcom_reader.registry.structures import (
    FamilyLink,
    Gender,
    Name,
    Pedigree,
    Relation,
)
from gedcom_reader.registry.utils import (
    Dispatch,
    NodeKind,
    Table,
    open_many,
    pointer_value,
    set_value,
)

if TYPE_CHECKING:
    from gedcom_reader.loader.tokenizer import LineToken


# ----------------------------------------------------------------------
# Handlers
# ----------------------------------------------------------------------

def _set_sex(individual: Individual, token: LineToken) -> None:
    individual.sex_raw = token.value
    individual.sex = Gender.from_value(token.value)


def _open_event(individual: Individual, token: LineToken) -> Dispatch:
    event = new_event(token.tag, token.value)
    individual.events.append(event)
    return Dispatch(NodeKind.EVENT, event)


def _open_attribute(individual: Individual, token: LineToken) -> Dispatch:
    attribute = new_event(token.tag, token.value)
    individual.attributes.append(attribute)
    return Dispatch(NodeKind.EVENT, attribute)


def _family_link(relation: Relation):
    def handler(individual: Individual, token: LineToken) -> Dispatch:
        link = FamilyLink(family=pointer_value(token), relation=relation)
        # a repeated FAMC/FAMS still gets a node so its PEDI/NOTE lines parse,
        # but only the first link is kept on the individual
        individual.add_family(link)
        return Dispatch(NodeKind.FAMILY_LINK, link)
    return handler


def _set_pedigree(link: FamilyLink, token: LineToken) -> None:
    link.pedigree_text = token.value
    link.pedigree = Pedigree.from_value(token.value)


# ----------------------------------------------------------------------
# Tables
# ----------------------------------------------------------------------

INDIVIDUAL_TABLE: Table = {
    "NAME": open_many("names", NodeKind.NAME, lambda t: Name(value=t.value)),
    "SEX": _set_sex,
    "FAMC": _family_link(Relation.CHILD),
    "FAMS": _family_link(Relation.SPOUSE),
    **{tag: _open_event for tag in INDIVIDUAL_EVENT_TAGS},
    **{tag: _open_attribute for tag in INDIVIDUAL_ATTRIBUTE_TAGS},
    **record_handlers(citations=True, multimedia=True, refn=True),
}

NAME_TABLE: Table = {
    "GIVN": set_value("given"),
    "SURN": set_value("surname"),
    "NPFX": set_value("prefix"),
    "SPFX": set_value("surname_prefix"),
    "NSFX": set_value("suffix"),
    "NICK": set_value("nickname"),
    "TYPE": set_value("type"),
    "NOTE": open_many("notes", NodeKind.NOTE, new_note),
    "SOUR": open_many("source_citations", NodeKind.SOURCE_CITATION, new_citation),
}

FAMILY_LINK_TABLE: Table = {
    "PEDI": _set_pedigree,
    "NOTE": open_many("notes", NodeKind.NOTE, new_note),
}

TABLES: Dict[NodeKind, Table] = {
    NodeKind.INDIVIDUAL: INDIVIDUAL_TABLE,
    NodeKind.NAME: NAME_TABLE,
    NodeKind.FAMILY_LINK: FAMILY_LINK_TABLE,
}
