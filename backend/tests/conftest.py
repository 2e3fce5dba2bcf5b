from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_session

from mindgraph.graph.graph_schema import GraphState
from mindgraph.session.editor_session import EditorSession
from mindgraph.session.sample_graph import sample_graph


@pytest.fixture()
def graph() -> GraphState:
    return sample_graph()


@pytest.fixture()
def session(graph: GraphState) -> EditorSession:
    return EditorSession(graph)


@pytest.fixture()
def client(session: EditorSession):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_session] = lambda: session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
