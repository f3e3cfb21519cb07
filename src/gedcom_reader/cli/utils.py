# src/gedcom_reader/cli/utils.py

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from gedcom_reader.logging import set_debug
from gedcom_reader.parser_core import GEDCOMParser
from gedcom_reader.registry.build_registry import ParseResult

console = Console()


def load_gedcom(path: Path, *, verbose: bool = False) -> ParseResult:
    """
    Read and parse a GEDCOM file; references are resolved.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    if verbose:
        set_debug(True)

    t0 = time.perf_counter()
    result = GEDCOMParser().run(path)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s ({len(result.diagnostics)} diagnostics)")

    return result


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
