from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

NODE_TYPE = "colored"
DESCRIPTION_MARKER = "(...)"


def derive_label(title: str, description: str) -> str:
    """
    Display label shown on the canvas.

    The label is never authoritative; it is always recomputed from
    title and description.
    """
    if description:
        return title + DESCRIPTION_MARKER
    return title


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> "Position":
        return Position(x=self.x + dx, y=self.y + dy)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class NodeContent:
    """
    User-editable payload of a node plus its derived label.
    """

    title: str
    color: str
    description: str = ""
    label: str = ""

    @staticmethod
    def create(title: str, color: str, description: str = "") -> "NodeContent":
        return NodeContent(
            title=title,
            color=color,
            description=description,
            label=derive_label(title, description),
        )

    def with_fields(
        self,
        *,
        title: Optional[str] = None,
        color: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "NodeContent":
        return NodeContent.create(
            title=self.title if title is None else title,
            color=self.color if color is None else color,
            description=self.description if description is None else description,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "color": self.color,
            "description": self.description,
            "label": self.label,
        }


@dataclass(frozen=True)
class Node:
    """
    A colored box on the canvas.
    """

    id: str
    position: Position
    content: NodeContent
    type: str = NODE_TYPE

    def with_content(self, content: NodeContent) -> "Node":
        return replace(self, content=content)

    def with_position(self, position: Position) -> "Node":
        return replace(self, position=position)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "position": self.position.to_dict(),
            "data": self.content.to_dict(),
        }


@dataclass(frozen=True)
class Edge:
    """
    Directed connection between two nodes.
    """

    id: str
    source: str
    target: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "source": self.source, "target": self.target}


@dataclass
class GraphState:
    """
    Ordered node and edge sequences; the shape stored in history.
    """

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    @staticmethod
    def empty() -> "GraphState":
        return GraphState(nodes=[], edges=[])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
