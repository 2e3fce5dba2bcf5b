from __future__ import annotations

import logging
import random
from typing import List, Optional
from uuid import uuid4

from mindgraph.graph.graph_schema import Edge, Node, NodeContent, Position

DEFAULT_TITLE = "New Node"
DEFAULT_COLOR = "#8b5cf6"
COPY_SUFFIX = " (Copy)"

SPAWN_ORIGIN = 100.0
SPAWN_RANGE = 400.0
DUPLICATE_OFFSET = 50.0

logger = logging.getLogger("mindgraph.graph")


class GraphStore:
    """
    Pure transformations over node and edge sequences.

    Every operation returns a new list and leaves its inputs untouched.
    Unknown ids never raise: removals and updates become no-ops and
    lookups return None.
    """

    # -------------------- Ids --------------------

    @staticmethod
    def generate_node_id() -> str:
        return f"node-{uuid4()}"

    @staticmethod
    def generate_edge_id() -> str:
        return f"edge-{uuid4()}"

    # -------------------- Node factories --------------------

    @staticmethod
    def create_node(rng: Optional[random.Random] = None) -> Node:
        """
        New node with placeholder content at a randomized position so
        that consecutive nodes do not stack on top of each other.
        """
        rng = rng or random
        return Node(
            id=GraphStore.generate_node_id(),
            position=Position(
                x=rng.random() * SPAWN_RANGE + SPAWN_ORIGIN,
                y=rng.random() * SPAWN_RANGE + SPAWN_ORIGIN,
            ),
            content=NodeContent.create(
                title=DEFAULT_TITLE,
                color=DEFAULT_COLOR,
                description="",
            ),
        )

    @staticmethod
    def duplicate_node(node: Node) -> Node:
        return Node(
            id=GraphStore.generate_node_id(),
            position=node.position.offset(DUPLICATE_OFFSET, DUPLICATE_OFFSET),
            content=node.content.with_fields(
                title=f"{node.content.title}{COPY_SUFFIX}",
            ),
            type=node.type,
        )

    # -------------------- Nodes --------------------

    @staticmethod
    def add_node(nodes: List[Node], node: Node) -> List[Node]:
        return [*nodes, node]

    @staticmethod
    def remove_node(nodes: List[Node], node_id: str) -> List[Node]:
        return [n for n in nodes if n.id != node_id]

    @staticmethod
    def update_node_data(
        nodes: List[Node],
        node_id: str,
        content: NodeContent,
    ) -> List[Node]:
        # label is recomputed even if the caller passed a stale one
        fresh = NodeContent.create(
            title=content.title,
            color=content.color,
            description=content.description,
        )
        return [n.with_content(fresh) if n.id == node_id else n for n in nodes]

    @staticmethod
    def move_node(
        nodes: List[Node],
        node_id: str,
        position: Position,
    ) -> List[Node]:
        return [n.with_position(position) if n.id == node_id else n for n in nodes]

    @staticmethod
    def find_node(nodes: List[Node], node_id: str) -> Optional[Node]:
        return next((n for n in nodes if n.id == node_id), None)

    @staticmethod
    def get_node_ids(nodes: List[Node]) -> List[str]:
        return [n.id for n in nodes]

    # -------------------- Edges --------------------

    @staticmethod
    def connect(
        edges: List[Edge],
        source: str,
        target: str,
        edge_id: Optional[str] = None,
    ) -> List[Edge]:
        """
        Append a directed edge. Parallel edges are allowed; only a
        colliding edge id is rejected.
        """
        edge_id = edge_id or GraphStore.generate_edge_id()
        if any(e.id == edge_id for e in edges):
            logger.debug("connect skipped: edge id %s already present", edge_id)
            return list(edges)
        return [*edges, Edge(id=edge_id, source=source, target=target)]

    @staticmethod
    def remove_edge(edges: List[Edge], edge_id: str) -> List[Edge]:
        return [e for e in edges if e.id != edge_id]

    @staticmethod
    def remove_node_edges(edges: List[Edge], node_id: str) -> List[Edge]:
        return [e for e in edges if e.source != node_id and e.target != node_id]

    @staticmethod
    def find_edge(edges: List[Edge], edge_id: str) -> Optional[Edge]:
        return next((e for e in edges if e.id == edge_id), None)

    # -------------------- Validation --------------------

    @staticmethod
    def validate_edges(nodes: List[Node], edges: List[Edge]) -> bool:
        node_ids = {n.id for n in nodes}
        return all(e.source in node_ids and e.target in node_ids for e in edges)
