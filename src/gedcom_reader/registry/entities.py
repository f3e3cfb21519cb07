from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Iterator, List, Optional, Tuple

from gedcom_reader.registry.structures import (
    Address,
    ChangeDate,
    CustomData,
    DateValue,
    Encoding,
    Event,
    FamilyLink,
    GedcomMeta,
    Gender,
    GenericAttribute,
    HeaderSource,
    MultimediaFile,
    MultimediaFormat,
    MultimediaLink,
    Name,
    NoteStructure,
    Pointer,
    RecordKind,
    RepoCitation,
    SkippedTag,
    SourceCitation,
    SourceData,
    UserReferenceNumber,
    XrefLink,
    pointer_field,
)


# -----------------------------
# Record base
# -----------------------------

@dataclass(slots=True)
class Record:
    """
    Common shape of every level-0 record.

    xref:         declared cross-reference id ("@I1@"), if any
    lineno:       line of the opening level-0 line
    custom_data:  user-defined ``_TAG`` subtrees found anywhere in the record
    skipped_tags: tags the dispatcher does not model, kept verbatim
    """
    kind: ClassVar[RecordKind]

    xref: Optional[str] = None
    lineno: int = 0
    custom_data: List[CustomData] = field(default_factory=list)
    skipped_tags: List[SkippedTag] = field(default_factory=list)


# -----------------------------
# Records
# -----------------------------

@dataclass(slots=True)
class Header(Record):
    kind: ClassVar[RecordKind] = RecordKind.HEADER

    encoding: Optional[Encoding] = None
    copyright: Optional[str] = None
    date: Optional[DateValue] = None
    destinations: List[str] = field(default_factory=list)
    gedcom: Optional[GedcomMeta] = None
    language: Optional[str] = None
    filename: Optional[str] = None
    note: Optional[str] = None
    source: Optional[HeaderSource] = None
    submitter: Optional[Pointer] = pointer_field(RecordKind.SUBMITTER)
    submission: Optional[Pointer] = pointer_field(RecordKind.SUBMISSION)
    place_form: List[str] = field(default_factory=list)


@dataclass(slots=True)
class Submission(Record):
    kind: ClassVar[RecordKind] = RecordKind.SUBMISSION

    name_of_family_file: Optional[str] = None
    temple_code: Optional[str] = None
    submitter: Optional[Pointer] = pointer_field(RecordKind.SUBMITTER)
    generations_of_ancestors: Optional[str] = None
    generations_of_descendants: Optional[str] = None
    ordinance_process_flag: Optional[str] = None
    automated_record_id: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None


@dataclass(slots=True)
class Submitter(Record):
    kind: ClassVar[RecordKind] = RecordKind.SUBMITTER

    name: Optional[str] = None
    address: Optional[Address] = None
    phones: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)
    faxes: List[str] = field(default_factory=list)
    websites: List[str] = field(default_factory=list)
    language: Optional[str] = None
    automated_record_id: Optional[str] = None
    notes: List[NoteStructure] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None


@dataclass(slots=True)
class Individual(Record):
    kind: ClassVar[RecordKind] = RecordKind.INDIVIDUAL

    names: List[Name] = field(default_factory=list)
    sex: Gender = Gender.UNKNOWN
    sex_raw: Optional[str] = None
    events: List[Event] = field(default_factory=list)
    attributes: List[Event] = field(default_factory=list)
    families: List[FamilyLink] = field(default_factory=list)
    source_citations: List[SourceCitation] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    user_reference_numbers: List[UserReferenceNumber] = field(default_factory=list)
    automated_record_id: Optional[str] = None
    change_date: Optional[ChangeDate] = None

    @property
    def name(self) -> Optional[Name]:
        """Primary (first) name."""
        return self.names[0] if self.names else None

    def add_family(self, link: FamilyLink) -> bool:
        """Append a family link unless the same family+relation is present."""
        key = str(link.family)
        for existing in self.families:
            if str(existing.family) == key and existing.relation is link.relation:
                return False
        self.families.append(link)
        return True


@dataclass(slots=True)
class Family(Record):
    """
    HUSB and WIFE are plain pointers to individuals; no gender checking
    is done.
    """
    kind: ClassVar[RecordKind] = RecordKind.FAMILY

    husband: Optional[Pointer] = pointer_field(RecordKind.INDIVIDUAL)
    wife: Optional[Pointer] = pointer_field(RecordKind.INDIVIDUAL)
    children: List[Pointer] = pointer_field(RecordKind.INDIVIDUAL, many=True)
    num_children: Optional[int] = None
    events: List[Event] = field(default_factory=list)
    source_citations: List[SourceCitation] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    user_reference_numbers: List[UserReferenceNumber] = field(default_factory=list)
    automated_record_id: Optional[str] = None
    change_date: Optional[ChangeDate] = None


@dataclass(slots=True)
class Source(Record):
    kind: ClassVar[RecordKind] = RecordKind.SOURCE

    title: Optional[str] = None
    author: Optional[str] = None
    abbreviation: Optional[str] = None
    publication: Optional[str] = None
    text: Optional[str] = None
    data: Optional[SourceData] = None
    repo_citations: List[RepoCitation] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    multimedia: List[MultimediaLink] = field(default_factory=list)
    automated_record_id: Optional[str] = None
    change_date: Optional[ChangeDate] = None


@dataclass(slots=True)
class Repository(Record):
    kind: ClassVar[RecordKind] = RecordKind.REPOSITORY

    name: Optional[str] = None
    address: Optional[Address] = None
    phones: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)
    websites: List[str] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    automated_record_id: Optional[str] = None
    change_date: Optional[ChangeDate] = None


@dataclass(slots=True)
class Multimedia(Record):
    """
    OBJE record. FORM and TITL are accepted both under FILE (5.5.1) and as
    siblings of FILE (seen in Ancestry.com exports).
    """
    kind: ClassVar[RecordKind] = RecordKind.MULTIMEDIA

    files: List[MultimediaFile] = field(default_factory=list)
    form: Optional[MultimediaFormat] = None
    title: Optional[str] = None
    user_reference_numbers: List[UserReferenceNumber] = field(default_factory=list)
    automated_record_id: Optional[str] = None
    source_citations: List[SourceCitation] = field(default_factory=list)
    notes: List[NoteStructure] = field(default_factory=list)
    change_date: Optional[ChangeDate] = None


@dataclass(slots=True)
class NoteRecord(Record):
    kind: ClassVar[RecordKind] = RecordKind.NOTE

    value: Optional[str] = None
    source_citations: List[SourceCitation] = field(default_factory=list)
    user_reference_numbers: List[UserReferenceNumber] = field(default_factory=list)
    automated_record_id: Optional[str] = None
    change_date: Optional[ChangeDate] = None


# kind -> (record class, GedcomData attribute)
RECORD_TYPES: Dict[RecordKind, Tuple[type, str]] = {
    RecordKind.HEADER: (Header, "header"),
    RecordKind.SUBMISSION: (Submission, "submissions"),
    RecordKind.SUBMITTER: (Submitter, "submitters"),
    RecordKind.INDIVIDUAL: (Individual, "individuals"),
    RecordKind.FAMILY: (Family, "families"),
    RecordKind.SOURCE: (Source, "sources"),
    RecordKind.REPOSITORY: (Repository, "repositories"),
    RecordKind.MULTIMEDIA: (Multimedia, "multimedia"),
    RecordKind.NOTE: (NoteRecord, "notes"),
}


# -----------------------------
# Container
# -----------------------------

@dataclass(slots=True)
class GedcomData:
    """
    Finished data model: one ordered list per record kind, in file order.
    """
    header: Optional[Header] = None
    submitters: List[Submitter] = field(default_factory=list)
    submissions: List[Submission] = field(default_factory=list)
    individuals: List[Individual] = field(default_factory=list)
    families: List[Family] = field(default_factory=list)
    repositories: List[Repository] = field(default_factory=list)
    sources: List[Source] = field(default_factory=list)
    multimedia: List[Multimedia] = field(default_factory=list)
    notes: List[NoteRecord] = field(default_factory=list)

    # Level-0 ``_TAG`` records and unknown level-0 tags
    custom_data: List[CustomData] = field(default_factory=list)
    skipped_records: List[GenericAttribute] = field(default_factory=list)
    trailer_seen: bool = False

    def records_of(self, kind: RecordKind) -> List[Record]:
        _, attr = RECORD_TYPES[kind]
        if kind is RecordKind.HEADER:
            return [self.header] if self.header is not None else []
        return getattr(self, attr)

    def iter_records(self) -> Iterator[Record]:
        """Every record, header first, then kind by kind."""
        for kind in RecordKind:
            yield from self.records_of(kind)

    def lookup(self, link: XrefLink) -> Optional[Record]:
        """Return the record an XrefLink designates."""
        for record in self.records_of(link.kind):
            if record.xref == link.xref:
                return record
        return None

    def summary(self) -> Dict[str, int]:
        """Count of each record kind, by sequence length."""
        return {
            "submitters": len(self.submitters),
            "submissions": len(self.submissions),
            "individuals": len(self.individuals),
            "families": len(self.families),
            "repositories": len(self.repositories),
            "sources": len(self.sources),
            "multimedia": len(self.multimedia),
            "notes": len(self.notes),
        }
