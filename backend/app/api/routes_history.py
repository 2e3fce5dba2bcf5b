from fastapi import APIRouter, Depends, HTTPException, status

from mindgraph.session.editor_session import EditorSession

from backend.app.api.routes_graph import graph_response, history_status
from backend.app.api.schemas import CommitResponse, GraphResponse, HistoryStatus
from backend.app.dependencies import get_session

router = APIRouter()


@router.get("/", response_model=HistoryStatus)
def history(session: EditorSession = Depends(get_session)):
    return history_status(session)


@router.post("/undo", response_model=GraphResponse)
def undo(session: EditorSession = Depends(get_session)):
    if session.undo() is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="nothing to undo",
        )
    return graph_response(session)


@router.post("/redo", response_model=GraphResponse)
def redo(session: EditorSession = Depends(get_session)):
    if session.redo() is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="nothing to redo",
        )
    return graph_response(session)


@router.post("/commit", response_model=CommitResponse)
def commit(session: EditorSession = Depends(get_session)):
    captured = session.commit_edit()
    return CommitResponse(captured=captured, history=history_status(session))
