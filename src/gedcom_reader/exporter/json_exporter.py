"""
json_exporter.py
Structured JSON conversion for the finished GedcomData model.

This module:
- Converts dataclasses to dictionaries (NOT strings), field by field
- Writes XrefLink as {"xref": "@I1@", "kind": "INDI"} and enums by value
- Rebuilds a GedcomData from such a dictionary using the model's type hints

Only public dataclass fields are read or written.
"""

from __future__ import annotations

import json
import types
import typing
from dataclasses import fields, is_dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Union

from gedcom_reader.logging import get_logger
from gedcom_reader.registry.entities import GedcomData
from gedcom_reader.registry.structures import RecordKind, XrefLink

log = get_logger(__name__)

_NoneType = type(None)


# ----------------------------------------------------------------------
# Model -> JSON-compatible
# ----------------------------------------------------------------------

def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert model objects into JSON-compatible structures.

    Rules:
    - XrefLink → {"xref", "kind"}
    - Enum → its value
    - Primitives pass through
    - dataclasses → dict of their fields (recursively)
    - list / tuple → list (recursively)
    """
    if isinstance(obj, XrefLink):
        return {"xref": obj.xref, "kind": obj.kind.value}

    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _to_json_compatible(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [_to_json_compatible(v) for v in obj]

    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def to_dict(data: GedcomData) -> Dict[str, Any]:
    return _to_json_compatible(data)


# ----------------------------------------------------------------------
# JSON-compatible -> model
# ----------------------------------------------------------------------

@lru_cache(maxsize=None)
def _hints(cls: type) -> Dict[str, Any]:
    return typing.get_type_hints(cls)


def _from_json_compatible(value: Any, hint: Any) -> Any:
    if value is None:
        return None

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin is Union or origin is types.UnionType:
        options = [a for a in args if a is not _NoneType]
        if XrefLink in options and isinstance(value, dict):
            return XrefLink(kind=RecordKind(value["kind"]), xref=value["xref"])
        return _from_json_compatible(value, options[0])

    if origin is list:
        return [_from_json_compatible(v, args[0]) for v in value]

    if isinstance(hint, type):
        if is_dataclass(hint):
            return _build(hint, value)
        if issubclass(hint, Enum):
            return hint(value)

    return value


def _build(cls: type, payload: Dict[str, Any]) -> Any:
    hints = _hints(cls)
    kwargs = {
        f.name: _from_json_compatible(payload[f.name], hints[f.name])
        for f in fields(cls)
        if f.init and f.name in payload
    }
    return cls(**kwargs)


def from_dict(payload: Dict[str, Any]) -> GedcomData:
    """Rebuild a GedcomData written by to_dict(); unknown keys are ignored."""
    if not isinstance(payload, dict):
        raise TypeError(f"Expected a mapping, got {type(payload).__name__}")
    return _build(GedcomData, payload)


# ----------------------------------------------------------------------
# Text / file
# ----------------------------------------------------------------------

def build_export_dict(data: GedcomData) -> Dict[str, Any]:
    """to_dict() plus a 'summary' block of record counts."""
    return {"summary": data.summary(), **to_dict(data)}


def serialize_data_to_json_string(data: GedcomData, *, indent: int | None = 2) -> str:
    return json.dumps(build_export_dict(data), indent=indent, ensure_ascii=False)


def export_data_json(data: GedcomData, output_path: Path, *, indent: int | None = 2) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(serialize_data_to_json_string(data, indent=indent), encoding="utf-8")
    log.info("Wrote JSON export: %s", output_path)
