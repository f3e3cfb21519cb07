# tests/test_parser_core.py

from __future__ import annotations

import types

import pytest

from gedcom_reader.config import GRConfig
from gedcom_reader.core.context import ParsePolicy
from gedcom_reader.core.diagnostics import DiagnosticKind
from gedcom_reader.core.exceptions import InvalidInputError, MissingHeaderError
from gedcom_reader.parser_core import GEDCOMParser, iter_records, parse
from gedcom_reader.registry.entities import Family, Individual
from gedcom_reader.registry.structures import XrefLink
from gedcom_reader.utils import mock_file_path


def _read(name: str) -> str:
    return mock_file_path(name).read_text(encoding="utf-8")


def test_simple_file_counts():
    data, diags = parse(_read("simple.ged"))
    assert diags == []
    assert data.summary() == {
        "submitters": 1,
        "submissions": 0,
        "individuals": 3,
        "families": 2,
        "repositories": 1,
        "sources": 1,
        "multimedia": 0,
        "notes": 0,
    }
    assert data.header is None
    assert data.trailer_seen is False


def test_family_file_counts_and_values():
    data, diags = parse(_read("family.ged"))
    assert diags == []
    assert data.summary() == {
        "submitters": 1,
        "submissions": 1,
        "individuals": 3,
        "families": 1,
        "repositories": 1,
        "sources": 1,
        "multimedia": 1,
        "notes": 1,
    }
    assert data.header.note == (
        "This file demonstrates the record kinds\n"
        "the reader understands. The word TEST should not be broken!"
    )
    assert data.sources[0].text == "Baptised at St. Mary's"
    assert data.notes[0].value == "John was known as\na fine carpenter."
    assert data.individuals[0].custom_data[0].tag == "_UID"
    assert [c.tag for c in data.custom_data] == ["_PLAC_DEFN"]
    assert data.trailer_seen is True


def test_malformed_file_diagnostics_in_order():
    data, diags = parse(_read("malformed.ged"))
    assert [(d.kind, d.line_number) for d in diags] == [
        (DiagnosticKind.LEVEL_SKIP, 1),
        (DiagnosticKind.MALFORMED_LINE, 7),
        (DiagnosticKind.LEVEL_SKIP, 9),
        (DiagnosticKind.UNSUPPORTED_TAG, 12),
        (DiagnosticKind.DUPLICATE_XREF, 5),
        (DiagnosticKind.DUPLICATE_XREF, 14),
        (DiagnosticKind.UNSUPPORTED_TAG, 18),
        (DiagnosticKind.UNSUPPORTED_TAG, 19),
        (DiagnosticKind.DANGLING_REFERENCE, 10),
        (DiagnosticKind.DANGLING_REFERENCE, 11),
    ]
    assert "WIBBLE" in diags[3].message
    assert "MYSTERY" in diags[7].message

    assert len(data.individuals) == 2
    assert len(data.families) == 1
    assert len(data.skipped_records) == 1
    assert data.skipped_records[0].children[0].tag == "DETAIL"
    assert data.trailer_seen is True

    first = data.individuals[0]
    assert first.events[0].date.value == "1 JAN 1900"
    wibble = first.skipped_tags[0]
    assert wibble.tag == "WIBBLE"
    assert wibble.children[0].tag == "NESTED"


def test_bytes_input_rejected():
    with pytest.raises(InvalidInputError):
        parse(b"0 HEAD\n0 TRLR")


def test_require_header_policy():
    strict = ParsePolicy(require_header=True)
    with pytest.raises(MissingHeaderError):
        parse("0 @I1@ INDI", strict)
    with pytest.raises(MissingHeaderError):
        parse("", strict)

    data, _ = parse("0 HEAD\n0 TRLR", strict)
    assert data.header is not None


def test_empty_input_is_empty_model():
    data, diags = parse("")
    assert diags == []
    assert sum(data.summary().values()) == 0
    assert data.header is None


def test_parse_is_idempotent():
    text = _read("malformed.ged")
    first = parse(text)
    second = parse(text)
    assert first.diagnostics == second.diagnostics
    assert first.data.summary() == second.data.summary()
    assert first.data == second.data


def test_record_counts_are_conserved():
    text = _read("family.ged")
    level_zero = [
        line for line in text.splitlines()
        if line.startswith("0 ") and line.strip() != "0 TRLR"
    ]
    data, _ = parse(text)
    parsed = len(list(data.iter_records())) + len(data.custom_data) + len(data.skipped_records)
    assert parsed == len(level_zero)


def test_first_policy_keeps_first_duplicate():
    text = "0 @I1@ INDI\n1 NAME First /One/\n0 @I1@ INDI\n1 NAME Second /Two/\n0 @F1@ FAM\n1 HUSB @I1@"
    data, diags = parse(text, ParsePolicy(duplicate_xref="first"))
    assert len(data.individuals) == 2
    assert len(diags) == 2
    assert data.lookup(data.families[0].husband).name.value == "First /One/"

    data, _ = parse(text)
    assert data.lookup(data.families[0].husband).name.value == "Second /Two/"


def test_iter_records_is_lazy_and_unresolved():
    records = iter_records(_read("simple.ged"))
    assert isinstance(records, types.GeneratorType)

    first = next(records)
    assert first.xref == "@SUBM1@"

    rest = list(records)
    assert [type(r) for r in rest[:3]] == [Individual, Individual, Individual]
    fam = next(r for r in rest if isinstance(r, Family))
    assert fam.husband == "@I1@"
    assert not isinstance(fam.husband, XrefLink)


def test_iter_records_rejects_bytes_on_first_step():
    records = iter_records(b"0 HEAD")
    with pytest.raises(InvalidInputError):
        next(records)


def test_parser_run_reads_file():
    parser = GEDCOMParser(GRConfig({}))
    result = parser.run(mock_file_path("simple.ged"))
    assert parser.text is not None
    assert parser.result is result
    assert len(result.data.individuals) == 3
    assert result.diagnostics == []


def test_parser_policy_from_config():
    parser = GEDCOMParser(GRConfig({"parser": {"duplicate_xref": "FIRST"}}))
    assert parser.policy == ParsePolicy(duplicate_xref="first", require_header=False)


def test_parser_run_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GEDCOMParser(GRConfig({})).run(tmp_path / "nope.ged")
