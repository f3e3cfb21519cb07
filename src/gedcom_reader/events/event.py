# src/gedcom_reader/events/event.py

from __future__ import annotations

from typing import Dict, Optional

from gedcom_reader.registry.structures import Event


# ---------------------------------------------------------------------------
# Event Tag Definitions (GEDCOM 5.5.1 / 5.5.5)
# ---------------------------------------------------------------------------

INDIVIDUAL_EVENT_TAGS: set[str] = {
    "BIRT", "CHR", "CHRA", "BAPM", "BARM", "BASM", "BLES",
    "ADOP", "CONF", "FCOM", "GRAD", "ORDN", "EMIG", "IMMI",
    "NATU", "CENS", "PROB", "WILL", "RETI", "DEAT", "BURI",
    "CREM", "EVEN",  # EVEN = generic event
}

FAMILY_EVENT_TAGS: set[str] = {
    "MARR", "MARB", "MARC", "MARL", "MARS",
    "ENGA", "ANUL", "DIV", "DIVF", "CENS", "EVEN",
}

INDIVIDUAL_ATTRIBUTE_TAGS: set[str] = {
    "CAST", "DSCR", "EDUC", "IDNO", "NATI", "NCHI", "NMR",
    "OCCU", "PROP", "RELI", "RESI", "SSN", "TITL", "FACT",
}

# Event type normalization map
EVENT_TYPE_MAP: Dict[str, str] = {
    "BIRT": "Birth",
    "CHR": "Christening",
    "CHRA": "Adult Christening",
    "BAPM": "Baptism",
    "BARM": "Bar Mitzvah",
    "BASM": "Bas Mitzvah",
    "BLES": "Blessing",
    "ADOP": "Adoption",
    "CONF": "Confirmation",
    "FCOM": "First Communion",
    "ORDN": "Ordination",
    "MARR": "Marriage",
    "MARB": "Marriage Banns",
    "MARC": "Marriage Contract",
    "MARL": "Marriage License",
    "MARS": "Marriage Settlement",
    "ANUL": "Annulment",
    "DIV": "Divorce",
    "DIVF": "Divorce Filed",
    "ENGA": "Engagement",
    "DEAT": "Death",
    "BURI": "Burial",
    "CREM": "Cremation",
    "EMIG": "Emigration",
    "IMMI": "Immigration",
    "NATU": "Naturalization",
    "CENS": "Census",
    "GRAD": "Graduation",
    "PROB": "Probate",
    "WILL": "Will",
    "RETI": "Retirement",
    "EVEN": "Event",
    "CAST": "Caste",
    "DSCR": "Physical Description",
    "EDUC": "Education",
    "IDNO": "National ID Number",
    "NATI": "Nationality",
    "NCHI": "Children Count",
    "NMR": "Marriage Count",
    "OCCU": "Occupation",
    "PROP": "Possessions",
    "RELI": "Religion",
    "RESI": "Residence",
    "SSN": "Social Security Number",
    "TITL": "Nobility Title",
    "FACT": "Fact",
}


# ---------------------------------------------------------------------------
# Tag Helpers
# ---------------------------------------------------------------------------

def event_label(tag: str) -> Optional[str]:
    return EVENT_TYPE_MAP.get((tag or "").upper())


def new_event(tag: str, value: Optional[str] = None) -> Event:
    """Create an Event for ``tag`` with its human-readable label."""
    t = tag.upper()
    return Event(tag=t, label=event_label(t), value=value)
