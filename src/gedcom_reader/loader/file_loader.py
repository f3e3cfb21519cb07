"""
File Loader

Resolves and reads GEDCOM files from disk. Decoding is UTF-8 with
``errors="replace"``; a leading BOM is left for the tokenizer to drop.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from gedcom_reader.logging import get_logger

log = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def resolve_input_path(path: PathLike) -> Path:
    """Return the absolute path of an existing regular file."""
    abs_path = Path(path).expanduser().resolve()
    log.debug("Resolving input file: %s", abs_path)

    if not abs_path.exists():
        log.error("Input file does not exist: %s", abs_path)
        raise FileNotFoundError(f"Input file not found: {abs_path}")

    if not abs_path.is_file():
        log.error("Input path is not a file: %s", abs_path)
        raise ValueError(f"Input path is not a file: {abs_path}")

    return abs_path


def load_file(path: PathLike) -> str:
    abs_path = resolve_input_path(path)
    with open(abs_path, "r", encoding="utf-8", errors="replace", newline="") as f:
        text = f.read()
    log.info("Loaded file: %s (%d characters)", abs_path, len(text))
    return text
