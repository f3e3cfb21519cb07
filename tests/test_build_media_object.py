# tests/test_build_media_object.py

from __future__ import annotations

from gedcom_reader.parser_core import parse
from gedcom_reader.registry.structures import RecordKind, XrefLink


def _parse(*lines: str):
    return parse("\n".join(lines))


def test_basic_multimedia_record_with_sibling_form() -> None:
    data, diags = _parse(
        "0 HEAD",
        "1 CHAR UTF-8",
        "1 SOUR Ancestry.com Family Trees",
        "2 VERS (2010.3)",
        "2 NAME Ancestry.com Family Trees",
        "2 CORP Ancestry.com",
        "1 GEDC",
        "2 VERS 5.5",
        "2 FORM LINEAGE-LINKED",
        "0 OBJE",
        "1 FILE http://trees.ancestry.com/rd?f=image&guid=Xxxxxxxx&tid=Xxxxxxxx&pid=1",
        "1 FORM jpg",
        "1 TITL In Prague",
        "0 TRLR",
    )
    assert diags == []
    assert len(data.multimedia) == 1
    obje = data.multimedia[0]
    assert obje.xref is None
    assert obje.title == "In Prague"
    assert obje.form.value == "jpg"
    assert obje.files[0].value == "http://trees.ancestry.com/rd?f=image&guid=Xxxxxxxx&tid=Xxxxxxxx&pid=1"


def test_multimedia_structure() -> None:
    data, diags = _parse(
        "0 HEAD",
        "1 GEDC",
        "2 VERS 5.5",
        "0 @MEDIA1@ OBJE",
        "1 FILE /home/user/media/file_name.bmp",
        "2 FORM bmp",
        "3 TYPE photo",
        "2 TITL A Bitmap",
        "1 REFN 000",
        "2 TYPE User Reference Type",
        "1 RIN Automated Id",
        "1 NOTE A note",
        "2 CONT Note continued here. The word TE",
        "2 CONC ST should not be broken!",
        "1 SOUR @SOUR1@",
        "2 PAGE 42",
        "2 _CUSTOM Custom data",
        "1 CHAN ",
        "2 DATE 1 APR 1998",
        "3 TIME 12:34:56.789",
        "2 NOTE A note",
        "3 CONT Note continued here. The word TE",
        "3 CONC ST should not be broken!",
        "0 @SOUR1@ SOUR",
        "0 TRLR",
    )
    assert diags == []
    obje = data.multimedia[0]
    assert obje.xref == "@MEDIA1@"

    file = obje.files[0]
    assert file.value == "/home/user/media/file_name.bmp"
    assert file.title == "A Bitmap"
    assert file.form.value == "bmp"
    assert file.form.source_media_type == "photo"

    assert obje.user_reference_numbers[0].value == "000"
    assert obje.user_reference_numbers[0].type == "User Reference Type"
    assert obje.automated_record_id == "Automated Id"

    expected_note = "A note\nNote continued here. The word TEST should not be broken!"
    assert obje.notes[0].value == expected_note

    citation = obje.source_citations[0]
    assert citation.source == XrefLink(RecordKind.SOURCE, "@SOUR1@")
    assert citation.page == "42"
    assert citation.custom_data[0].tag == "_CUSTOM"
    assert citation.custom_data[0].value == "Custom data"

    chan = obje.change_date
    assert chan.date.value == "1 APR 1998"
    assert chan.date.time == "12:34:56.789"
    assert chan.notes[0].value == expected_note


def test_inline_multimedia_link() -> None:
    data, diags = _parse(
        "0 @I1@ INDI",
        "1 OBJE",
        "2 FILE portrait.jpg",
        "3 FORM jpg",
        "2 TITL Portrait",
    )
    assert diags == []
    link = data.individuals[0].multimedia[0]
    assert link.multimedia is None
    assert link.file.value == "portrait.jpg"
    assert link.file.form.value == "jpg"
    assert link.title == "Portrait"
