"""
Graph subsystem for mindgraph.

Defines the node/edge value types and the pure operations the editor
uses to derive one graph state from another:
- create, duplicate, delete and update nodes
- connect and disconnect nodes
- structural lookups and edge validation
"""

from mindgraph.graph.graph_schema import Position, NodeContent, Node, Edge, GraphState
from mindgraph.graph.graph_store import GraphStore
from mindgraph.graph.graph_query import GraphQueryEngine

__all__ = [
    "Position",
    "NodeContent",
    "Node",
    "Edge",
    "GraphState",
    "GraphStore",
    "GraphQueryEngine",
]
