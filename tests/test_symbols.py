# tests/test_symbols.py

from __future__ import annotations

import pytest

from gedcom_reader.core.diagnostics import DiagnosticKind, DiagnosticLog
from gedcom_reader.registry.entities import Family, Individual
from gedcom_reader.registry.structures import RecordKind
from gedcom_reader.registry.symbols import SymbolTable


def test_declare_and_lookup():
    table = SymbolTable()
    person = Individual(xref="@I1@", lineno=3)
    family = Family(xref="@F1@", lineno=7)

    assert table.declare(person) is True
    assert table.declare(family) is True

    assert "@I1@" in table
    assert len(table) == 2
    assert table.get("@I1@").record is person
    assert table.get("@I1@").lineno == 3
    assert table.kind_of("@F1@") is RecordKind.FAMILY
    assert table.kind_of("@X9@") is None
    assert table.by_kind(RecordKind.INDIVIDUAL) == {"@I1@": person}
    assert list(table) == ["@I1@", "@F1@"]


def test_record_without_xref_is_not_declared():
    table = SymbolTable()
    assert table.declare(Individual(lineno=1)) is False
    assert len(table) == 0


def test_duplicate_reports_both_declarations_last_wins():
    log = DiagnosticLog()
    table = SymbolTable(diagnostics=log)
    first = Individual(xref="@I1@", lineno=1)
    second = Individual(xref="@I1@", lineno=5)
    third = Family(xref="@I1@", lineno=9)

    table.declare(first)
    assert table.declare(second) is True
    assert table.declare(third) is True

    assert [d.kind for d in log] == [DiagnosticKind.DUPLICATE_XREF] * 3
    assert [d.line_number for d in log] == [1, 5, 9]
    assert table.get("@I1@").record is third
    assert table.kind_of("@I1@") is RecordKind.FAMILY


def test_duplicate_first_policy_keeps_original():
    log = DiagnosticLog()
    table = SymbolTable(policy="first", diagnostics=log)
    first = Individual(xref="@I1@", lineno=1)
    second = Individual(xref="@I1@", lineno=5)

    table.declare(first)
    assert table.declare(second) is False
    assert table.get("@I1@").record is first
    assert len(log) == 2


def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        SymbolTable(policy="newest")
