from __future__ import annotations

from mindgraph.graph.graph_schema import Edge, GraphState, Node, NodeContent, Position


def clone_node(node: Node) -> Node:
    return Node(
        id=node.id,
        position=Position(x=node.position.x, y=node.position.y),
        content=NodeContent(
            title=node.content.title,
            color=node.content.color,
            description=node.content.description,
            label=node.content.label,
        ),
        type=node.type,
    )


def clone_edge(edge: Edge) -> Edge:
    return Edge(id=edge.id, source=edge.source, target=edge.target)


def clone_state(state: GraphState) -> GraphState:
    """
    Structural copy of a graph state.

    Lists, nodes, positions, content payloads and edges are all fresh
    objects, so the copy shares nothing with its source.
    """
    return GraphState(
        nodes=[clone_node(n) for n in state.nodes],
        edges=[clone_edge(e) for e in state.edges],
    )
