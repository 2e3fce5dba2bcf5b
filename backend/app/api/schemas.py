from typing import List, Optional
from pydantic import BaseModel

from mindgraph.graph.graph_schema import Edge, GraphState, Node


class PositionModel(BaseModel):
    x: float
    y: float


class NodeContentModel(BaseModel):
    title: str
    color: str
    description: str = ""


class NodeDataModel(NodeContentModel):
    label: str


class GraphNode(BaseModel):
    id: str
    type: str
    position: PositionModel
    data: NodeDataModel

    @staticmethod
    def from_node(node: Node) -> "GraphNode":
        return GraphNode(
            id=node.id,
            type=node.type,
            position=PositionModel(x=node.position.x, y=node.position.y),
            data=NodeDataModel(
                title=node.content.title,
                color=node.content.color,
                description=node.content.description,
                label=node.content.label,
            ),
        )


class GraphEdge(BaseModel):
    id: str
    source: str
    target: str

    @staticmethod
    def from_edge(edge: Edge) -> "GraphEdge":
        return GraphEdge(id=edge.id, source=edge.source, target=edge.target)


class HistoryStatus(BaseModel):
    length: int
    index: int
    can_undo: bool
    can_redo: bool


class GraphResponse(BaseModel):
    nodes: List[GraphNode]
    edges: List[GraphEdge]
    selected: List[str]
    history: HistoryStatus

    @staticmethod
    def from_state(
        state: GraphState,
        *,
        selected: List[str],
        history: HistoryStatus,
    ) -> "GraphResponse":
        return GraphResponse(
            nodes=[GraphNode.from_node(n) for n in state.nodes],
            edges=[GraphEdge.from_edge(e) for e in state.edges],
            selected=selected,
            history=history,
        )


class GraphStatsResponse(BaseModel):
    nodes: int
    edges: int
    valid: bool
    dangling_edges: List[str]
    history_length: int


class NeighborsResponse(BaseModel):
    node_id: str
    successors: List[str]
    predecessors: List[str]
    edges: List[GraphEdge]


class ConnectRequest(BaseModel):
    source: str
    target: str


class SelectionRequest(BaseModel):
    node_ids: List[str]


class CommitResponse(BaseModel):
    captured: bool
    history: HistoryStatus


class NodeResponse(BaseModel):
    node: GraphNode
    history: HistoryStatus


class EdgeResponse(BaseModel):
    edge: GraphEdge
    history: HistoryStatus


class SelectionResponse(BaseModel):
    selected: List[str]
    editing: Optional[GraphNode] = None
