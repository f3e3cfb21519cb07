# src/gedcom_reader/cli/commands/export.py

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcom_reader.cli.utils import load_gedcom, write_json
from gedcom_reader.exporter.json_exporter import build_export_dict

console = Console(stderr=True)


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export GEDCOM data to JSON (stdout by default).
    """
    data, diags = load_gedcom(gedcom, verbose=verbose)

    payload = build_export_dict(data)
    payload["diagnostics"] = [
        {"kind": d.kind.value, "line_number": d.line_number, "message": d.message}
        for d in diags
    ]

    if verbose:
        console.log("Exporting JSON")

    write_json(payload, out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")
