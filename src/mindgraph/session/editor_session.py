from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from mindgraph.config.settings import EditorConfig
from mindgraph.graph.graph_schema import Edge, GraphState, Node, NodeContent, Position
from mindgraph.graph.graph_store import GraphStore
from mindgraph.history.history_log import HistoryLog
from mindgraph.history.snapshot import clone_state
from mindgraph.session.changes import EdgeChange, NodeChange
from mindgraph.session.sample_graph import sample_graph

Listener = Callable[[GraphState], None]

logger = logging.getLogger("mindgraph.session")


class EditorSession:
    """
    Owns the live graph of one editing session.

    Translates editor intents (create, duplicate, delete, edit, connect,
    drag) into GraphStore calls, pushes the result to listeners and
    records history snapshots.

    Capturing is two-phase: an operation first requests a capture, then
    applies its new graph value; the snapshot is taken only once the
    live graph reflects that value. Restores from undo/redo never
    record a snapshot.
    """

    def __init__(
        self,
        initial_state: Optional[GraphState] = None,
        *,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig()

        if initial_state is None:
            initial_state = (
                sample_graph() if self.config.seed_sample_graph else GraphState.empty()
            )

        self._state = clone_state(initial_state)
        self._history = HistoryLog(
            self._state,
            max_steps=self.config.history.max_steps,
        )

        self._capture_pending = False
        self._restoring = False

        self._selected_nodes: List[str] = []
        self._selected_edges: List[str] = []
        self._listeners: List[Listener] = []

    # ------------------------------------------------------------------
    # Live state
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> List[Node]:
        return list(self._state.nodes)

    @property
    def edges(self) -> List[Edge]:
        return list(self._state.edges)

    def state(self) -> GraphState:
        return clone_state(self._state)

    def set_state(self, state: GraphState) -> None:
        self._state = GraphState(nodes=list(state.nodes), edges=list(state.edges))
        self._on_state_changed()

    def set_nodes(self, nodes: List[Node]) -> None:
        self.set_state(GraphState(nodes=nodes, edges=self._state.edges))

    def set_edges(self, edges: List[Edge]) -> None:
        self.set_state(GraphState(nodes=self._state.nodes, edges=edges))

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with a copy of the graph after
        every applied change. Returns an unsubscribe callable.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Capture protocol
    # ------------------------------------------------------------------

    @property
    def capture_pending(self) -> bool:
        return self._capture_pending

    def request_capture(self) -> None:
        self._capture_pending = True

    def flush(self) -> bool:
        """
        Complete a pending capture against the current live graph.
        """
        if self._restoring or not self._capture_pending:
            return False

        self._capture_pending = False
        self._history.capture(self._state)
        return True

    def capture_snapshot(self) -> bool:
        """
        Commit point: record the live graph as it is now.
        """
        self.request_capture()
        return self.flush()

    def _on_state_changed(self) -> None:
        self.flush()
        self._prune_selection()

        for listener in list(self._listeners):
            listener(clone_state(self._state))

    # ------------------------------------------------------------------
    # Graph operations
    # ------------------------------------------------------------------

    def create_node(self) -> Node:
        node = GraphStore.create_node()
        self.request_capture()
        self.set_nodes(GraphStore.add_node(self._state.nodes, node))

        logger.info("node created: %s", node.id)
        return node

    def duplicate_node(self, node_id: str) -> Optional[Node]:
        original = GraphStore.find_node(self._state.nodes, node_id)
        if original is None:
            return None

        node = GraphStore.duplicate_node(original)
        self.request_capture()
        self.set_nodes(GraphStore.add_node(self._state.nodes, node))

        logger.info("node duplicated: %s -> %s", node_id, node.id)
        return node

    def delete_node(self, node_id: str) -> bool:
        if GraphStore.find_node(self._state.nodes, node_id) is None:
            return False

        edges = GraphStore.remove_node_edges(self._state.edges, node_id)
        dropped = len(self._state.edges) - len(edges)

        self.request_capture()
        self.set_state(
            GraphState(
                nodes=GraphStore.remove_node(self._state.nodes, node_id),
                edges=edges,
            )
        )

        logger.info("node deleted: %s (edges removed=%s)", node_id, dropped)
        return True

    def update_node_data(
        self,
        node_id: str,
        *,
        title: str,
        color: str,
        description: str,
    ) -> Optional[Node]:
        """
        Apply an in-progress content edit. No snapshot is taken; the
        editing panel calls commit_edit() when the edit settles.
        """
        if GraphStore.find_node(self._state.nodes, node_id) is None:
            return None

        content = NodeContent.create(title=title, color=color, description=description)
        self.set_nodes(GraphStore.update_node_data(self._state.nodes, node_id, content))
        return GraphStore.find_node(self._state.nodes, node_id)

    def commit_edit(self) -> bool:
        return self.capture_snapshot()

    def move_node(self, node_id: str, x: float, y: float) -> Optional[Node]:
        if GraphStore.find_node(self._state.nodes, node_id) is None:
            return None

        self.set_nodes(
            GraphStore.move_node(self._state.nodes, node_id, Position(x=x, y=y))
        )
        return GraphStore.find_node(self._state.nodes, node_id)

    def end_drag(self) -> bool:
        return self.capture_snapshot()

    def connect(self, source: str, target: str) -> Optional[Edge]:
        known = GraphStore.get_node_ids(self._state.nodes)
        if source not in known or target not in known:
            logger.debug("connect ignored: %s -> %s", source, target)
            return None

        edges = GraphStore.connect(self._state.edges, source, target)
        self.request_capture()
        self.set_edges(edges)

        edge = edges[-1]
        logger.info("edge connected: %s (%s -> %s)", edge.id, source, target)
        return edge

    def remove_edge(self, edge_id: str) -> bool:
        if GraphStore.find_edge(self._state.edges, edge_id) is None:
            return False

        self.request_capture()
        self.set_edges(GraphStore.remove_edge(self._state.edges, edge_id))

        logger.info("edge removed: %s", edge_id)
        return True

    # ------------------------------------------------------------------
    # Renderer events
    # ------------------------------------------------------------------

    def apply_node_changes(self, changes: Iterable[NodeChange]) -> None:
        """
        Apply a batch of canvas events as one state update.

        Removals and drag drops are committed; in-flight drags and
        selection toggles are not.
        """
        nodes = self._state.nodes
        edges = self._state.edges
        commit = False

        for change in changes:
            if change.kind == "position":
                if GraphStore.find_node(nodes, change.id) is None:
                    continue
                # a drop may arrive without coordinates
                if change.position is not None:
                    nodes = GraphStore.move_node(nodes, change.id, change.position)
                commit = commit or not change.dragging
            elif change.kind == "remove":
                if GraphStore.find_node(nodes, change.id) is None:
                    continue
                nodes = GraphStore.remove_node(nodes, change.id)
                edges = GraphStore.remove_node_edges(edges, change.id)
                commit = True
            elif change.kind == "select":
                self._toggle(self._selected_nodes, change.id, change.selected)

        if commit:
            self.request_capture()
        self.set_state(GraphState(nodes=nodes, edges=edges))

    def apply_edge_changes(self, changes: Iterable[EdgeChange]) -> None:
        edges = self._state.edges
        commit = False

        for change in changes:
            if change.kind == "remove":
                if GraphStore.find_edge(edges, change.id) is None:
                    continue
                edges = GraphStore.remove_edge(edges, change.id)
                commit = True
            elif change.kind == "select":
                self._toggle(self._selected_edges, change.id, change.selected)

        if commit:
            self.request_capture()
        self.set_edges(edges)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def undo(self) -> Optional[GraphState]:
        return self._restore(self._history.undo(), "undo")

    def redo(self) -> Optional[GraphState]:
        return self._restore(self._history.redo(), "redo")

    def _restore(self, snapshot: Optional[GraphState], action: str) -> Optional[GraphState]:
        if snapshot is None:
            return None

        if self._capture_pending:
            logger.debug("%s discarded a pending capture", action)
            self._capture_pending = False

        self._restoring = True
        try:
            self.set_state(snapshot)
        finally:
            self._restoring = False

        logger.info(
            "%s: index=%s length=%s",
            action,
            self._history.current_index(),
            self._history.length(),
        )
        return self.state()

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo()

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo()

    @property
    def history_length(self) -> int:
        return self._history.length()

    @property
    def history_index(self) -> int:
        return self._history.current_index()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @property
    def selected_node_ids(self) -> List[str]:
        return list(self._selected_nodes)

    @property
    def selected_edge_ids(self) -> List[str]:
        return list(self._selected_edges)

    def select(self, node_ids: Iterable[str]) -> List[str]:
        known = set(GraphStore.get_node_ids(self._state.nodes))
        self._selected_nodes = [n for n in dict.fromkeys(node_ids) if n in known]
        return self.selected_node_ids

    def clear_selection(self) -> None:
        self._selected_nodes = []
        self._selected_edges = []

    def selected_node(self) -> Optional[Node]:
        """
        The node the editing panel works on: only when exactly one
        node is selected.
        """
        if len(self._selected_nodes) != 1:
            return None
        return GraphStore.find_node(self._state.nodes, self._selected_nodes[0])

    @staticmethod
    def _toggle(ids: List[str], item_id: str, selected: bool) -> None:
        if selected and item_id not in ids:
            ids.append(item_id)
        elif not selected and item_id in ids:
            ids.remove(item_id)

    def _prune_selection(self) -> None:
        node_ids = {n.id for n in self._state.nodes}
        edge_ids = {e.id for e in self._state.edges}
        self._selected_nodes = [n for n in self._selected_nodes if n in node_ids]
        self._selected_edges = [e for e in self._selected_edges if e in edge_ids]
