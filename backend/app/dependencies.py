from functools import lru_cache
import logging

from mindgraph.session.editor_session import EditorSession

from backend.app.config import AppConfig


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_session() -> EditorSession:
    config = get_config()
    session = EditorSession(config=config.mindgraph.editor)

    logging.getLogger("mindgraph.startup").info(
        "[startup] editor session ready: nodes=%s edges=%s max_steps=%s",
        len(session.nodes),
        len(session.edges),
        config.mindgraph.editor.history.max_steps,
    )
    return session
