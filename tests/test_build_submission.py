# tests/test_build_submission.py

from __future__ import annotations

from gedcom_reader.parser_core import parse
from gedcom_reader.registry.structures import RecordKind, XrefLink


def test_build_submission() -> None:
    data, diags = parse("\n".join([
        "0 HEAD",
        "1 SUBN @SUBMISSION@",
        "0 @SUBMISSION@ SUBN",
        "1 SUBM @SUBMITTER@",
        "1 FAMF NameOfFamilyFile",
        "1 TEMP Abreviated temple code",
        "1 ANCE 1",
        "1 DESC 1",
        "1 ORDI yes",
        "1 RIN 1",
        "0 @SUBMITTER@ SUBM",
        "1 NAME /Submitter/",
        "0 TRLR",
    ]))
    assert diags == []
    subn = data.submissions[0]
    assert subn.xref == "@SUBMISSION@"
    assert subn.submitter == XrefLink(RecordKind.SUBMITTER, "@SUBMITTER@")
    assert subn.name_of_family_file == "NameOfFamilyFile"
    assert subn.temple_code == "Abreviated temple code"
    assert subn.generations_of_ancestors == "1"
    assert subn.generations_of_descendants == "1"
    assert subn.ordinance_process_flag == "yes"
    assert subn.automated_record_id == "1"


def test_build_submitter() -> None:
    data, diags = parse("\n".join([
        "0 @U1@ SUBM",
        "1 NAME Jane Compiler",
        "1 ADDR 1 Main Street",
        "2 CONT Springfield",
        "2 CITY Springfield",
        "1 PHON +1 555 0101",
        "1 PHON +1 555 0102",
        "1 EMAIL jane@example.org",
        "1 FAX +1 555 0103",
        "1 WWW https://example.org/jane",
        "1 LANG English",
        "1 OBJE",
        "2 FILE jane.png",
        "1 CHAN",
        "2 DATE 7 SEP 2000",
        "3 TIME 8:35:36",
    ]))
    assert diags == []
    subm = data.submitters[0]
    assert subm.name == "Jane Compiler"
    assert subm.address.value == "1 Main Street\nSpringfield"
    assert subm.address.city == "Springfield"
    assert subm.phones == ["+1 555 0101", "+1 555 0102"]
    assert subm.emails == ["jane@example.org"]
    assert subm.faxes == ["+1 555 0103"]
    assert subm.websites == ["https://example.org/jane"]
    assert subm.language == "English"
    assert subm.multimedia[0].file.value == "jane.png"
    assert subm.change_date.date.time == "8:35:36"
