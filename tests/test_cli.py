# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

import gedcom_reader.cli as cli_package
from gedcom_reader.cli.app import app
from gedcom_reader.utils import mock_file_path

runner = CliRunner()


def test_stats_command_clean_file():
    result = runner.invoke(app, ["stats", str(mock_file_path("family.ged"))])
    assert result.exit_code == 0, result.output
    assert "GEDCOM Statistics" in result.stdout
    assert "Individuals" in result.stdout
    assert "No diagnostics" in result.stdout


def test_stats_command_lists_diagnostics():
    result = runner.invoke(app, ["stats", "-d", str(mock_file_path("malformed.ged"))])
    assert result.exit_code == 0, result.output
    assert "DanglingReference=2" in result.stdout
    assert "DuplicateXrefId=2" in result.stdout
    assert "WIBBLE" in result.stdout


def test_stats_command_missing_file(tmp_path):
    result = runner.invoke(app, ["stats", str(tmp_path / "nope.ged")])
    assert result.exit_code != 0


def test_export_command_stdout():
    result = runner.invoke(app, ["export", str(mock_file_path("simple.ged"))])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["summary"]["families"] == 2
    assert payload["diagnostics"] == []
    assert payload["families"][1]["wife"] == {"xref": "@I3@", "kind": "INDI"}


def test_export_command_to_file(tmp_path):
    out = tmp_path / "malformed.json"
    result = runner.invoke(
        app,
        ["export", str(mock_file_path("malformed.ged")), "--out", str(out), "--pretty"],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(out.read_text(encoding="utf-8"))
    kinds = [d["kind"] for d in payload["diagnostics"]]
    assert kinds[0] == "LevelSkipError"
    assert kinds.count("DanglingReference") == 2


def test_cli_modules_open_with_path_header():
    root = Path(cli_package.__file__).parent
    for name in ("app.py", "utils.py", "commands/export.py", "commands/stats.py"):
        first = (root / name).read_text(encoding="utf-8").splitlines()[0]
        assert first == f"# src/gedcom_reader/cli/{name}"
