from __future__ import annotations

from mindgraph.graph.graph_schema import Edge, GraphState, Node, NodeContent, Position


def _sample_node(node_id: str, x: float, y: float, title: str, color: str, description: str) -> Node:
    return Node(
        id=node_id,
        position=Position(x=x, y=y),
        content=NodeContent.create(title=title, color=color, description=description),
    )


def sample_graph() -> GraphState:
    """
    Starting graph of a fresh editing session.
    """
    return GraphState(
        nodes=[
            _sample_node(
                "1", 250.0, 100.0,
                "Welcome", "#3b82f6",
                "This is the first node. Click to select it!",
            ),
            _sample_node(
                "2", 100.0, 300.0,
                "Ideas", "#10b981",
                "Store your brilliant ideas here.",
            ),
            _sample_node(
                "3", 400.0, 300.0,
                "Tasks", "#f59e0b",
                "Keep track of things to do.",
            ),
        ],
        edges=[
            Edge(id="e1-2", source="1", target="2"),
            Edge(id="e1-3", source="1", target="3"),
        ],
    )
