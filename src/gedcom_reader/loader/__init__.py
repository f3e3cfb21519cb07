# src/gedcom_reader/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_reader.loader import (
        LineToken,
        tokenize_line,
        tokenize_text,
        merge_continuations,
        HierarchyBuilder,
        NodeArena,
        load_file,
    )
"""

from __future__ import annotations

from .file_loader import load_file, resolve_input_path
from .reconstruct import CONTINUATION_TAGS, merge_continuations, reconstruct_values
from .segmenter import HierarchyBuilder
from .tokenizer import LineToken, iter_lines, tokenize_line, tokenize_lines, tokenize_text
from .tree_builder import Node, NodeArena


__all__ = [
    "CONTINUATION_TAGS",
    "HierarchyBuilder",
    "LineToken",
    "Node",
    "NodeArena",
    "iter_lines",
    "load_file",
    "merge_continuations",
    "reconstruct_values",
    "resolve_input_path",
    "tokenize_line",
    "tokenize_lines",
    "tokenize_text",
]
