from fastapi import APIRouter, Depends, HTTPException, status

from mindgraph.graph.graph_query import GraphQueryEngine
from mindgraph.graph.graph_store import GraphStore
from mindgraph.session.editor_session import EditorSession

from backend.app.api.schemas import (
    ConnectRequest,
    EdgeResponse,
    GraphEdge,
    GraphNode,
    GraphResponse,
    GraphStatsResponse,
    HistoryStatus,
    NeighborsResponse,
    NodeContentModel,
    NodeResponse,
    PositionModel,
    SelectionRequest,
    SelectionResponse,
)
from backend.app.dependencies import get_session

router = APIRouter()


def history_status(session: EditorSession) -> HistoryStatus:
    return HistoryStatus(
        length=session.history_length,
        index=session.history_index,
        can_undo=session.can_undo,
        can_redo=session.can_redo,
    )


def graph_response(session: EditorSession) -> GraphResponse:
    return GraphResponse.from_state(
        session.state(),
        selected=session.selected_node_ids,
        history=history_status(session),
    )


def _node_not_found(node_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"node {node_id} not found",
    )


# -------------------- Graph --------------------


@router.get("/", response_model=GraphResponse)
def graph_export(session: EditorSession = Depends(get_session)):
    return graph_response(session)


@router.get("/stats", response_model=GraphStatsResponse)
def graph_stats(session: EditorSession = Depends(get_session)):
    state = session.state()
    engine = GraphQueryEngine(state)
    return GraphStatsResponse(
        nodes=engine.node_count(),
        edges=engine.edge_count(),
        valid=GraphStore.validate_edges(state.nodes, state.edges),
        dangling_edges=[e.id for e in engine.dangling_edges()],
        history_length=session.history_length,
    )


# -------------------- Nodes --------------------


@router.post("/nodes", response_model=NodeResponse, status_code=status.HTTP_201_CREATED)
def create_node(session: EditorSession = Depends(get_session)):
    node = session.create_node()
    return NodeResponse(node=GraphNode.from_node(node), history=history_status(session))


@router.post(
    "/nodes/{node_id}/duplicate",
    response_model=NodeResponse,
    status_code=status.HTTP_201_CREATED,
)
def duplicate_node(node_id: str, session: EditorSession = Depends(get_session)):
    node = session.duplicate_node(node_id)
    if node is None:
        raise _node_not_found(node_id)
    return NodeResponse(node=GraphNode.from_node(node), history=history_status(session))


@router.delete("/nodes/{node_id}", response_model=GraphResponse)
def delete_node(node_id: str, session: EditorSession = Depends(get_session)):
    if not session.delete_node(node_id):
        raise _node_not_found(node_id)
    return graph_response(session)


@router.put("/nodes/{node_id}/content", response_model=NodeResponse)
def update_node_content(
    node_id: str,
    content: NodeContentModel,
    session: EditorSession = Depends(get_session),
):
    node = session.update_node_data(
        node_id,
        title=content.title,
        color=content.color,
        description=content.description,
    )
    if node is None:
        raise _node_not_found(node_id)
    return NodeResponse(node=GraphNode.from_node(node), history=history_status(session))


@router.put("/nodes/{node_id}/position", response_model=NodeResponse)
def move_node(
    node_id: str,
    position: PositionModel,
    session: EditorSession = Depends(get_session),
):
    node = session.move_node(node_id, position.x, position.y)
    if node is None:
        raise _node_not_found(node_id)
    return NodeResponse(node=GraphNode.from_node(node), history=history_status(session))


@router.get("/nodes/{node_id}/neighbors", response_model=NeighborsResponse)
def node_neighbors(node_id: str, session: EditorSession = Depends(get_session)):
    state = session.state()
    if GraphStore.find_node(state.nodes, node_id) is None:
        raise _node_not_found(node_id)

    engine = GraphQueryEngine(state)
    return NeighborsResponse(
        node_id=node_id,
        successors=engine.neighbors(node_id),
        predecessors=engine.predecessors(node_id),
        edges=[GraphEdge.from_edge(e) for e in engine.connected_edges(node_id)],
    )


# -------------------- Edges --------------------


@router.post("/edges", response_model=EdgeResponse, status_code=status.HTTP_201_CREATED)
def connect(request: ConnectRequest, session: EditorSession = Depends(get_session)):
    edge = session.connect(request.source, request.target)
    if edge is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"cannot connect {request.source} -> {request.target}",
        )
    return EdgeResponse(edge=GraphEdge.from_edge(edge), history=history_status(session))


@router.delete("/edges/{edge_id}", response_model=GraphResponse)
def remove_edge(edge_id: str, session: EditorSession = Depends(get_session)):
    if not session.remove_edge(edge_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"edge {edge_id} not found",
        )
    return graph_response(session)


# -------------------- Selection --------------------


@router.post("/selection", response_model=SelectionResponse)
def select_nodes(request: SelectionRequest, session: EditorSession = Depends(get_session)):
    selected = session.select(request.node_ids)
    editing = session.selected_node()
    return SelectionResponse(
        selected=selected,
        editing=GraphNode.from_node(editing) if editing is not None else None,
    )
