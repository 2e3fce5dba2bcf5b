from __future__ import annotations

from typing import List

import networkx as nx

from mindgraph.graph.graph_schema import Edge, GraphState


class GraphQueryEngine:
    """
    Read-only structural view over a graph state.

    Built on a MultiDiGraph since parallel edges between the same pair
    of nodes are legal. The view is computed once at construction and
    does not follow later edits.
    """

    def __init__(self, state: GraphState) -> None:
        self._graph = nx.MultiDiGraph()
        self._edges: List[Edge] = list(state.edges)

        for node in state.nodes:
            self._graph.add_node(node.id, data=node)

        for edge in self._edges:
            if edge.source in self._graph and edge.target in self._graph:
                self._graph.add_edge(edge.source, edge.target, key=edge.id, data=edge)

    # -------------------- Traversal --------------------

    def neighbors(self, node_id: str) -> List[str]:
        if node_id not in self._graph:
            return []
        return list(self._graph.successors(node_id))

    def predecessors(self, node_id: str) -> List[str]:
        if node_id not in self._graph:
            return []
        return list(self._graph.predecessors(node_id))

    def connected_edges(self, node_id: str) -> List[Edge]:
        if node_id not in self._graph:
            return []
        return [
            e for e in self._edges
            if e.source == node_id or e.target == node_id
        ]

    # -------------------- Integrity --------------------

    def dangling_edges(self) -> List[Edge]:
        return [
            e for e in self._edges
            if e.source not in self._graph or e.target not in self._graph
        ]

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return len(self._edges)
