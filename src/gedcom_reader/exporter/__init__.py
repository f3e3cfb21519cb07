"""
Exporter package.

Re-exports the JSON adapter used by the CLI and by library callers.
"""

from __future__ import annotations

from .exporter import export_data_to_json
from .json_exporter import from_dict, serialize_data_to_json_string, to_dict

__all__ = [
    "export_data_to_json",
    "from_dict",
    "serialize_data_to_json_string",
    "to_dict",
]
