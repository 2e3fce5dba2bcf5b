import json
import logging
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig  # noqa: E402
from mindgraph.graph.graph_store import GraphStore  # noqa: E402
from mindgraph.session.editor_session import EditorSession  # noqa: E402


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("mindgraph.run")
    start = time.perf_counter()
    config = AppConfig()

    session = EditorSession(config=config.mindgraph.editor)

    def report(label: str) -> None:
        state = session.state()
        elapsed = time.perf_counter() - start
        logger.info(
            "[%s] nodes=%s edges=%s valid=%s undo=%s redo=%s (%.3fs)",
            label,
            len(state.nodes),
            len(state.edges),
            GraphStore.validate_edges(state.nodes, state.edges),
            session.can_undo,
            session.can_redo,
            elapsed,
        )

    report("start")

    node = session.create_node()
    session.connect("1", node.id)
    report("create+connect")

    session.update_node_data(
        node.id,
        title="Groceries",
        color="#ef4444",
        description="Milk, eggs, coffee",
    )
    session.commit_edit()
    report("edit")

    copy = session.duplicate_node(node.id)
    session.delete_node("1")
    report("duplicate+delete")

    session.undo()
    session.undo()
    report("undo x2")

    session.redo()
    report("redo")

    logger.info(json.dumps(session.state().to_dict(), indent=2))
    logger.info("duplicate id: %s", copy.id if copy else None)


if __name__ == "__main__":
    main()
