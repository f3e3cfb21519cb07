# src/gedcom_reader/cli/app.py

from __future__ import annotations

import typer

from gedcom_reader.cli.commands.export import export_command
from gedcom_reader.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-reader",
    help="GEDCOM reader: statistics, diagnostics and JSON export",
    add_completion=False,
)

app.command("export")(export_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
