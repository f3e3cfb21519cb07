# src/gedcom_reader/loader/tree_builder.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, TYPE_CHECKING

from .tokenizer import LineToken

if TYPE_CHECKING:
    from gedcom_reader.registry.utils import NodeKind


@dataclass(slots=True)
class Node:
    """
    One logical GEDCOM line placed in the document hierarchy.

    Nodes live in a flat NodeArena and refer to their parent by arena index,
    never by object reference.

    Attributes:
        index: Position of this node in the arena.
        level: Level of the originating line.
        tag / value / xref_id / lineno: Copied from the LineToken.
        kind: NodeKind the dispatcher assigned to this node.
        target: The model object this node populates (record, sub-structure,
            SkippedTag, CustomData), or None for value-only leaves.
        parent: Arena index of the parent node, None for level-0 records.
        reattached: True when the line skipped a level and was attached to
            the nearest valid ancestor instead.
    """

    index: int
    level: int
    tag: str
    value: Optional[str]
    xref_id: Optional[str]
    lineno: int
    kind: "NodeKind"
    target: Any = None
    parent: Optional[int] = None
    reattached: bool = False

    def __repr__(self) -> str:
        xref = f" {self.xref_id}" if self.xref_id else ""
        return f"<Node #{self.index} {self.level}{xref} {self.tag} ({self.kind.name})>"


@dataclass
class NodeArena:
    """
    Flat, append-only store for every node of one parse.

    The hierarchy stack holds arena indices; closing a node is a pop of an
    integer and nothing else.
    """

    nodes: List[Node] = field(default_factory=list)

    _children: Dict[int, List[int]] = field(default_factory=dict, init=False, repr=False)

    def add(
        self,
        token: LineToken,
        kind: "NodeKind",
        target: Any = None,
        parent: Optional[int] = None,
        reattached: bool = False,
    ) -> int:
        index = len(self.nodes)
        self.nodes.append(
            Node(
                index=index,
                level=token.level,
                tag=token.tag,
                value=token.value,
                xref_id=token.xref_id,
                lineno=token.lineno,
                kind=kind,
                target=target,
                parent=parent,
                reattached=reattached,
            )
        )
        if parent is not None:
            self._children.setdefault(parent, []).append(index)
        return index

    # ------------------------------------------------------------------ #
    # Core helpers
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def children_of(self, index: int) -> List[Node]:
        return [self.nodes[i] for i in self._children.get(index, [])]

    def parent_of(self, index: int) -> Optional[Node]:
        parent = self.nodes[index].parent
        return None if parent is None else self.nodes[parent]

    # ------------------------------------------------------------------ #
    # Public query API
    # ------------------------------------------------------------------ #

    def records(self) -> List[Node]:
        """All level-0 nodes in file order."""
        return [n for n in self.nodes if n.parent is None and n.level == 0]

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<NodeArena nodes={len(self.nodes)}>"
