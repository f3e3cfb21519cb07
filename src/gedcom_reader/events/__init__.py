"""
GEDCOM event and attribute tag vocabulary.
"""

from gedcom_reader.events.event import (
    EVENT_TYPE_MAP,
    FAMILY_EVENT_TAGS,
    INDIVIDUAL_ATTRIBUTE_TAGS,
    INDIVIDUAL_EVENT_TAGS,
    event_label,
    new_event,
)

__all__ = [
    "EVENT_TYPE_MAP",
    "FAMILY_EVENT_TAGS",
    "INDIVIDUAL_ATTRIBUTE_TAGS",
    "INDIVIDUAL_EVENT_TAGS",
    "event_label",
    "new_event",
]
