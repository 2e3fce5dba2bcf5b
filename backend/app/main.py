from fastapi import FastAPI
from contextlib import asynccontextmanager

from backend.app.config import AppConfig
from backend.app.api.routes_graph import router as graph_router
from backend.app.api.routes_history import router as history_router
from backend.app.dependencies import get_session


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle hooks.

    The editing session is created once at startup so the first
    request does not pay for it.
    """
    get_session()

    yield


def create_app(config: AppConfig) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )

    app.include_router(
        graph_router,
        prefix=f"{config.api_prefix}/graph",
        tags=["graph"],
    )

    app.include_router(
        history_router,
        prefix=f"{config.api_prefix}/history",
        tags=["history"],
    )

    return app


config = AppConfig()
app = create_app(config)
