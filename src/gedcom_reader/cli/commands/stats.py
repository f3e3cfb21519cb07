# src/gedcom_reader/cli/commands/stats.py

from __future__ import annotations

from collections import Counter
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_reader.cli.utils import load_gedcom

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    diagnostics: bool = typer.Option(
        False,
        "--diagnostics",
        "-d",
        help="List every diagnostic, not just the totals",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    data, diags = load_gedcom(gedcom, verbose=verbose)

    table = Table(title="GEDCOM Statistics")
    table.add_column("Record kind", style="bold")
    table.add_column("Count", justify="right")

    for kind, count in data.summary().items():
        table.add_row(kind.capitalize(), str(count))

    console.print(table)

    if not diags:
        console.print("[green]No diagnostics[/green]")
        return

    totals = Counter(d.kind.value for d in diags)
    console.print(
        "[yellow]Diagnostics:[/yellow] "
        + ", ".join(f"{kind}={count}" for kind, count in sorted(totals.items()))
    )

    if diagnostics:
        detail = Table(title="Diagnostics")
        detail.add_column("Line", justify="right")
        detail.add_column("Kind", style="bold")
        detail.add_column("Message")
        for d in diags:
            detail.add_row(str(d.line_number), d.kind.value, d.message)
        console.print(detail)
