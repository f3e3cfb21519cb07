# tests/test_build_individual.py

from __future__ import annotations

from gedcom_reader.core.diagnostics import DiagnosticKind
from gedcom_reader.parser_core import parse
from gedcom_reader.registry.structures import (
    Gender,
    Pedigree,
    RecordKind,
    Relation,
    XrefLink,
)


def _parse(*lines: str):
    return parse("\n".join(lines))


def test_build_individual_basic() -> None:
    data, diags = _parse(
        "0 @I1@ INDI",
        "1 NAME John Quincy /Smith/ Jr.",
        "2 GIVN John Quincy",
        "2 SURN Smith",
        "2 NPFX Dr.",
        "2 SPFX van",
        "2 NSFX Jr.",
        "2 NICK Jack",
        "2 TYPE birth",
        "1 SEX M",
    )
    assert diags == []
    ind = data.individuals[0]
    assert ind.xref == "@I1@"
    assert ind.lineno == 1
    assert ind.name.value == "John Quincy /Smith/ Jr."
    assert ind.name.given == "John Quincy"
    assert ind.name.surname == "Smith"
    assert ind.name.prefix == "Dr."
    assert ind.name.surname_prefix == "van"
    assert ind.name.suffix == "Jr."
    assert ind.name.nickname == "Jack"
    assert ind.name.type == "birth"
    assert ind.sex is Gender.MALE
    assert ind.sex_raw == "M"


def test_multiple_names_kept_in_order() -> None:
    data, _ = _parse("0 @I1@ INDI", "1 NAME A /B/", "1 NAME C /D/")
    assert [n.value for n in data.individuals[0].names] == ["A /B/", "C /D/"]


def test_unknown_sex_letter_falls_back_to_unknown() -> None:
    data, diags = _parse("0 @I1@ INDI", "1 SEX X")
    assert data.individuals[0].sex is Gender.UNKNOWN
    assert data.individuals[0].sex_raw == "X"
    assert diags == []


def test_nonbinary_sex() -> None:
    data, _ = _parse("0 @I1@ INDI", "1 SEX N")
    assert data.individuals[0].sex is Gender.NONBINARY


def test_events_and_attributes() -> None:
    data, diags = _parse(
        "0 @I1@ INDI",
        "1 BIRT",
        "2 DATE 12 MAR 1850",
        "2 PLAC Boston, Suffolk",
        "3 FORM City, County",
        "2 SOUR @S1@",
        "3 PAGE p. 42",
        "1 OCCU Carpenter",
        "2 DATE FROM 1870 TO 1900",
        "1 DEAT Y",
        "2 CAUS Pneumonia",
        "2 AGE 70y",
        "0 @S1@ SOUR",
    )
    assert diags == []
    ind = data.individuals[0]

    birth, death = ind.events
    assert birth.tag == "BIRT"
    assert birth.label == "Birth"
    assert birth.date.value == "12 MAR 1850"
    assert birth.place.value == "Boston, Suffolk"
    assert birth.place.form == "City, County"
    assert birth.source_citations[0].source == XrefLink(RecordKind.SOURCE, "@S1@")
    assert birth.source_citations[0].page == "p. 42"

    assert death.value == "Y"
    assert death.cause == "Pneumonia"
    assert death.age == "70y"

    occupation = ind.attributes[0]
    assert occupation.tag == "OCCU"
    assert occupation.value == "Carpenter"
    assert occupation.date.value == "FROM 1870 TO 1900"


def test_family_links_with_pedigree() -> None:
    data, diags = _parse(
        "0 @I1@ INDI",
        "1 FAMC @F1@",
        "2 PEDI adopted",
        "1 FAMS @F2@",
        "0 @F1@ FAM",
        "0 @F2@ FAM",
    )
    assert diags == []
    famc, fams = data.individuals[0].families
    assert famc.relation is Relation.CHILD
    assert famc.family == XrefLink(RecordKind.FAMILY, "@F1@")
    assert famc.pedigree is Pedigree.ADOPTED
    assert fams.relation is Relation.SPOUSE
    assert fams.pedigree is None


def test_duplicate_family_link_is_dropped() -> None:
    data, _ = _parse(
        "0 @I1@ INDI",
        "1 FAMS @F1@",
        "1 FAMS @F1@",
        "1 FAMC @F1@",
        "0 @F1@ FAM",
    )
    links = data.individuals[0].families
    assert [(str(l.family), l.relation) for l in links] == [
        ("@F1@", Relation.SPOUSE),
        ("@F1@", Relation.CHILD),
    ]


def test_family_link_without_pointer_is_unsupported() -> None:
    data, diags = _parse("0 @I1@ INDI", "1 FAMC not-a-pointer")
    assert data.individuals[0].families == []
    assert diags[0].kind is DiagnosticKind.UNSUPPORTED_TAG
    assert data.individuals[0].skipped_tags[0].tag == "FAMC"


def test_notes_multimedia_refn_rin_chan() -> None:
    data, diags = _parse(
        "0 @I1@ INDI",
        "1 NOTE Inline note",
        "2 CONT second line",
        "1 NOTE @N1@",
        "1 OBJE @M1@",
        "1 REFN 1234",
        "2 TYPE Ancestral File",
        "1 RIN 1001",
        "1 CHAN",
        "2 DATE 7 SEP 2000",
        "3 TIME 8:35:36",
        "0 @N1@ NOTE Shared",
        "0 @M1@ OBJE",
        "1 FILE photo.jpg",
    )
    assert diags == []
    ind = data.individuals[0]
    assert ind.notes[0].value == "Inline note\nsecond line"
    assert ind.notes[1].note == XrefLink(RecordKind.NOTE, "@N1@")
    assert ind.multimedia[0].multimedia == XrefLink(RecordKind.MULTIMEDIA, "@M1@")
    assert ind.user_reference_numbers[0].value == "1234"
    assert ind.user_reference_numbers[0].type == "Ancestral File"
    assert ind.automated_record_id == "1001"
    assert ind.change_date.date.value == "7 SEP 2000"
    assert ind.change_date.date.time == "8:35:36"


def test_custom_tags_on_individual() -> None:
    data, diags = _parse("0 @I1@ INDI", "1 _UID 7A1D", "2 _SUB nested")
    assert diags == []
    custom = data.individuals[0].custom_data[0]
    assert custom.tag == "_UID"
    assert custom.value == "7A1D"
    assert custom.children[0].tag == "_SUB"
