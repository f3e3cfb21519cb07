# src/gedcom_reader/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_reader.config import get_config


# This file lives at <project_root>/src/gedcom_reader/utils/pathing.py
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is defined as the directory that contains:
      - src/
      - tests/
      - config/
      - mock_files/
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root. Absolute paths are returned
    unchanged.

    Examples:
        resolve_project_path("mock_files/simple.ged")
        resolve_project_path(Path("logs") / "gedcom_reader.log")
    """
    path = Path(relative)
    return path if path.is_absolute() else project_root() / path


def mock_file_path(filename: Union[str, Path]) -> Path:
    """
    Return the absolute path to a sample GEDCOM file under the configured
    mock files directory (``paths.mock_files_dir``, default mock_files/).
    """
    mock_dir = get_config().paths.get("mock_files_dir") or "mock_files"
    return resolve_project_path(mock_dir) / filename
