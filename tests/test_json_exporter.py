# tests/test_json_exporter.py

from __future__ import annotations

import json

import pytest

from gedcom_reader.exporter import (
    export_data_to_json,
    from_dict,
    serialize_data_to_json_string,
    to_dict,
)
from gedcom_reader.parser_core import parse
from gedcom_reader.registry.structures import Gender, Pedigree
from gedcom_reader.utils import mock_file_path


@pytest.fixture
def family_data():
    data, _ = parse(mock_file_path("family.ged").read_text(encoding="utf-8"))
    return data


def test_to_dict_shapes(family_data):
    payload = to_dict(family_data)

    fam = payload["families"][0]
    assert fam["husband"] == {"xref": "@I1@", "kind": "INDI"}
    assert fam["children"] == [{"xref": "@I3@", "kind": "INDI"}]
    assert fam["num_children"] == 1

    john = payload["individuals"][0]
    assert john["sex"] == "M"
    assert john["names"][0]["surname"] == "Smith"
    assert john["custom_data"][0] == {
        "tag": "_UID",
        "value": "7A1D1B9E",
        "xref_id": None,
        "lineno": 77,
        "children": [],
    }
    assert payload["trailer_seen"] is True
    # the payload must be plain JSON
    json.dumps(payload)


def test_dangling_pointer_stays_raw_string():
    data, _ = parse("0 @F1@ FAM\n1 HUSB @I404@")
    assert to_dict(data)["families"][0]["husband"] == "@I404@"


def test_from_dict_rebuilds_model(family_data):
    rebuilt = from_dict(json.loads(json.dumps(to_dict(family_data))))
    assert rebuilt == family_data

    robert = rebuilt.individuals[2]
    assert robert.sex is Gender.MALE
    assert robert.families[0].pedigree is Pedigree.BIRTH
    assert rebuilt.lookup(rebuilt.families[0].wife).name.value == "Mary /Jones/"


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        from_dict(["not", "a", "mapping"])


def test_serialize_includes_summary(family_data):
    payload = json.loads(serialize_data_to_json_string(family_data, indent=None))
    assert payload["summary"]["individuals"] == 3
    assert payload["summary"]["multimedia"] == 1
    assert len(payload["individuals"]) == 3


def test_export_data_to_json_writes_file(tmp_path, family_data):
    out = export_data_to_json(family_data, tmp_path / "nested" / "family.json")
    assert out.exists()
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["sources"][0]["title"] == "Boston Parish Registers"


def test_export_data_to_json_type_check(tmp_path):
    with pytest.raises(TypeError):
        export_data_to_json({"individuals": []}, tmp_path / "x.json")
