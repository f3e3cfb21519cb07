from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


# -----------------------------
# Record kinds and pointers
# -----------------------------

class RecordKind(str, Enum):
    """Level-0 record kinds, valued by their GEDCOM tag."""
    HEADER = "HEAD"
    SUBMISSION = "SUBN"
    SUBMITTER = "SUBM"
    INDIVIDUAL = "INDI"
    FAMILY = "FAM"
    SOURCE = "SOUR"
    REPOSITORY = "REPO"
    MULTIMEDIA = "OBJE"
    NOTE = "NOTE"


@dataclass(frozen=True, slots=True)
class XrefLink:
    """A pointer that was validated against the symbol table."""
    kind: RecordKind
    xref: str

    def __str__(self) -> str:
        return self.xref


class RawPointer(str):
    """An unresolved '@id@' that remembers the line it was read from."""

    lineno: int

    def __new__(cls, xref: str, lineno: int = 0) -> "RawPointer":
        obj = super().__new__(cls, xref.strip())
        obj.lineno = lineno
        return obj


# Raw "@I1@" string before resolution, XrefLink after.
Pointer = Union[str, XrefLink]

_POINTER_RE = re.compile(r"^@[^@#\s][^@]*@$")


def is_pointer_value(value: Optional[str]) -> bool:
    """True when a line value is a bare '@...@' cross-reference."""
    return bool(value) and bool(_POINTER_RE.match(value.strip()))


def pointer_field(kind: RecordKind, *, many: bool = False):
    """
    Declare a dataclass field holding pointer(s) to records of ``kind``.

    The resolver finds pointer fields through this metadata.
    """
    if many:
        return field(default_factory=list, metadata={"pointer": kind})
    return field(default=None, metadata={"pointer": kind})


# -----------------------------
# Small enums
# -----------------------------

class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    NONBINARY = "N"
    UNKNOWN = "U"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "Gender":
        key = (value or "").strip().upper()[:1]
        for member in cls:
            if member.value == key:
                return member
        return cls.UNKNOWN


class Relation(str, Enum):
    CHILD = "FAMC"
    SPOUSE = "FAMS"


class Pedigree(str, Enum):
    ADOPTED = "adopted"
    BIRTH = "birth"
    FOSTER = "foster"
    SEALING = "sealing"

    @classmethod
    def from_value(cls, value: Optional[str]) -> Optional["Pedigree"]:
        key = (value or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return None


# -----------------------------
# Lossless capture
# -----------------------------

@dataclass(slots=True)
class GenericAttribute:
    """
    Lossless capture of an unmodeled GEDCOM subtree.

    Used both for user-defined ``_TAG`` data and for tags the dispatcher
    does not support; nested lines are kept in ``children``.
    """
    tag: str
    value: Optional[str] = None
    xref_id: Optional[str] = None
    lineno: Optional[int] = None
    children: List["GenericAttribute"] = field(default_factory=list)


# Names used by the record models
CustomData = GenericAttribute
SkippedTag = GenericAttribute


# -----------------------------
# Shared sub-structures
# -----------------------------

@dataclass(slots=True)
class Address:
    value: Optional[str] = None
    adr1: Optional[str] = None
    adr2: Optional[str] = None
    adr3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    post: Optional[str] = None
    country: Optional[str] = None


@dataclass(slots=True)
class DateValue:
    """DATE value with the optional TIME found under HEAD and CHAN."""
    value: Optional[str] = None
    time: Optional[str] = None

    def datetime(self) -> Optional[str]:
        if self.value and self.time:
            return f"{self.value} {self.time}"
        return self.value


@dataclass(slots=True)
class Translation:
    value: Optional[str] = None
    mime: Optional[str] = None
    language: Optional[str] = None


@dataclass(slots=True)
class CitationData:
    date: Optional[str] = None
    text: Optional[str] = None


@dataclass(slots=True)
class SourceCitation:
    """
    SOUR under another structure: either a pointer to a SOUR record or an
    inline description (GEDCOM 5.5 style).
    """
    source: Optional[Pointer] = pointer_field(RecordKind.SOURCE)
    description: Optional[str] = None
    page: Optional[str] = None
    text: Optional[str] = None
    data: Optional[CitationData] = None
    quality: Optional[str] = None
    notes: List["NoteStructure"] = field(default_factory=list)
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class NoteStructure:
    """NOTE under another structure: a pointer to a NOTE record or inline text."""
    note: Optional[Pointer] = pointer_field(RecordKind.NOTE)
    value: Optional[str] = None
    mime: Optional[str] = None
    language: Optional[str] = None
    translation: Optional[Translation] = None
    source_citations: List[SourceCitation] = field(default_factory=list)


@dataclass(slots=True)
class ChangeDate:
    date: Optional[DateValue] = None
    notes: List[NoteStructure] = field(default_factory=list)


@dataclass(slots=True)
class UserReferenceNumber:
    value: Optional[str] = None
    type: Optional[str] = None


@dataclass(slots=True)
class Place:
    value: Optional[str] = None
    form: Optional[str] = None


@dataclass(slots=True)
class MultimediaFormat:
    value: Optional[str] = None
    source_media_type: Optional[str] = None


@dataclass(slots=True)
class MultimediaFile:
    value: Optional[str] = None
    title: Optional[str] = None
    form: Optional[MultimediaFormat] = None


@dataclass(slots=True)
class MultimediaLink:
    """OBJE under another structure: pointer form or inline FILE/FORM/TITL."""
    multimedia: Optional[Pointer] = pointer_field(RecordKind.MULTIMEDIA)
    file: Optional[MultimediaFile] = None
    form: Optional[MultimediaFormat] = None
    title: Optional[str] = None


@dataclass(slots=True)
class Event:
    """An individual/family event or attribute, or a SOUR.DATA.EVEN entry."""
    tag: str
    label: Optional[str] = None
    value: Optional[str] = None
    date: Optional[DateValue] = None
    place: Optional[Place] = None
    type: Optional[str] = None
    age: Optional[str] = None
    cause: Optional[str] = None
    agency: Optional[str] = None
    address: Optional[Address] = None
    notes: List[NoteStructure] = field(default_factory=list)
    source_citations: List[SourceCitation] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    custom_data: List[CustomData] = field(default_factory=list)


@dataclass(slots=True)
class Name:
    value: Optional[str] = None
    given: Optional[str] = None
    surname: Optional[str] = None
    prefix: Optional[str] = None
    surname_prefix: Optional[str] = None
    suffix: Optional[str] = None
    nickname: Optional[str] = None
    type: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)
    source_citations: List[SourceCitation] = field(default_factory=list)


@dataclass(slots=True)
class FamilyLink:
    family: Optional[Pointer] = pointer_field(RecordKind.FAMILY)
    relation: Relation = Relation.CHILD
    pedigree: Optional[Pedigree] = None
    pedigree_text: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)


@dataclass(slots=True)
class RepoCitation:
    repository: Optional[Pointer] = pointer_field(RecordKind.REPOSITORY)
    call_number: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)


@dataclass(slots=True)
class SourceData:
    events: List[Event] = field(default_factory=list)
    agency: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)


@dataclass(slots=True)
class Corporation:
    value: Optional[str] = None
    address: Optional[Address] = None
    phones: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)
    faxes: List[str] = field(default_factory=list)
    websites: List[str] = field(default_factory=list)


@dataclass(slots=True)
class HeaderSourceData:
    value: Optional[str] = None
    date: Optional[DateValue] = None
    copyright: Optional[str] = None


@dataclass(slots=True)
class HeaderSource:
    """HEAD.SOUR: the product that produced the file."""
    value: Optional[str] = None
    version: Optional[str] = None
    name: Optional[str] = None
    corporation: Optional[Corporation] = None
    data: Optional[HeaderSourceData] = None


@dataclass(slots=True)
class GedcomMeta:
    version: Optional[str] = None
    form: Optional[str] = None


@dataclass(slots=True)
class Encoding:
    value: Optional[str] = None
    version: Optional[str] = None
