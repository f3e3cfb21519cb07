"""
exporter.py
High-level JSON export entry point.

    export_data_to_json(data, output_path)

It delegates the actual JSON construction to json_exporter.export_data_json.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from gedcom_reader.registry.entities import GedcomData

from .json_exporter import export_data_json


def export_data_to_json(data: GedcomData, output_path: Union[str, Path], **kwargs: Any) -> Path:
    """
    Export a parsed GedcomData to a JSON file.

    Keyword arguments (e.g. indent=None) are forwarded to
    json_exporter.export_data_json. Returns the path written.
    """
    if not isinstance(data, GedcomData):
        raise TypeError(
            f"export_data_to_json expects GedcomData, got {type(data).__name__}"
        )
    output_path = Path(output_path)
    export_data_json(data, output_path, **kwargs)
    return output_path
