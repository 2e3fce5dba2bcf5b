from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from mindgraph.graph.graph_schema import Position


@dataclass(frozen=True)
class NodeChange:
    """
    Low-level node event emitted by the rendering collaborator.

    - position: a drag moved the node; dragging=False marks the drop
    - remove: the node was deleted on the canvas
    - select: the node's selection flag toggled
    """

    kind: Literal["position", "remove", "select"]
    id: str
    position: Optional[Position] = None
    dragging: bool = False
    selected: bool = False

    @staticmethod
    def move(node_id: str, x: float, y: float, *, dragging: bool = True) -> "NodeChange":
        return NodeChange(
            kind="position",
            id=node_id,
            position=Position(x=x, y=y),
            dragging=dragging,
        )

    @staticmethod
    def drop(node_id: str) -> "NodeChange":
        return NodeChange(kind="position", id=node_id, dragging=False)

    @staticmethod
    def remove(node_id: str) -> "NodeChange":
        return NodeChange(kind="remove", id=node_id)

    @staticmethod
    def select(node_id: str, selected: bool = True) -> "NodeChange":
        return NodeChange(kind="select", id=node_id, selected=selected)


@dataclass(frozen=True)
class EdgeChange:
    """
    Low-level edge event emitted by the rendering collaborator.
    """

    kind: Literal["remove", "select"]
    id: str
    selected: bool = False

    @staticmethod
    def remove(edge_id: str) -> "EdgeChange":
        return EdgeChange(kind="remove", id=edge_id)

    @staticmethod
    def select(edge_id: str, selected: bool = True) -> "EdgeChange":
        return EdgeChange(kind="select", id=edge_id, selected=selected)
