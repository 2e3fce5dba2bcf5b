import pytest

from mindgraph.graph.graph_schema import Edge, GraphState, Node, NodeContent, Position
from mindgraph.graph.graph_store import GraphStore
from mindgraph.history.history_log import HistoryLog
from mindgraph.history.snapshot import clone_state


def _state(*titles: str) -> GraphState:
    return GraphState(
        nodes=[
            Node(
                id=str(i),
                position=Position(x=float(i), y=float(i)),
                content=NodeContent.create(title=t, color="#000"),
            )
            for i, t in enumerate(titles)
        ],
        edges=[],
    )


def _titles(state: GraphState) -> list[str]:
    return [n.content.title for n in state.nodes]


# -------------------- Initial state --------------------


def test_new_log_holds_single_entry():
    history = HistoryLog(_state("A"))

    assert history.length() == 1
    assert len(history) == 1
    assert history.current_index() == 0
    assert history.can_undo() is False
    assert history.can_redo() is False
    assert history.undo() is None
    assert history.redo() is None
    assert history.current_index() == 0


def test_default_depth_is_sixteen():
    history = HistoryLog(_state("A"))
    for i in range(40):
        history.capture(_state(f"S{i}"))

    assert history.length() == 17
    assert history.current_index() == 16


def test_negative_depth_is_rejected():
    with pytest.raises(ValueError):
        HistoryLog(_state("A"), max_steps=-1)


# -------------------- Capture / undo / redo --------------------


def test_capture_advances_index():
    history = HistoryLog(_state("A"))
    history.capture(_state("A", "B"))

    assert history.length() == 2
    assert history.current_index() == 1
    assert history.can_undo() is True
    assert history.can_redo() is False


def test_undo_and_redo_walk_the_log():
    history = HistoryLog(_state("A"))
    history.capture(_state("B"))
    history.capture(_state("C"))

    assert _titles(history.undo()) == ["B"]
    assert _titles(history.undo()) == ["A"]
    assert history.undo() is None
    assert history.current_index() == 0

    assert _titles(history.redo()) == ["B"]
    assert _titles(history.redo()) == ["C"]
    assert history.redo() is None
    assert history.current_index() == 2


def test_capture_after_undo_clears_branch():
    history = HistoryLog(_state("A"))
    history.capture(_state("B"))
    history.capture(_state("C"))

    history.undo()
    history.undo()
    history.capture(_state("D"))

    assert history.can_redo() is False
    assert history.redo() is None
    assert history.length() == 2

    assert _titles(history.undo()) == ["A"]
    assert _titles(history.redo()) == ["D"]
    assert history.redo() is None


def test_partial_undo_then_capture_keeps_prefix():
    history = HistoryLog(_state("A"))
    for t in ("B", "C", "D"):
        history.capture(_state(t))

    history.undo()
    history.capture(_state("E"))

    assert history.length() == 4
    assert _titles(history.undo()) == ["C"]
    assert _titles(history.undo()) == ["B"]


# -------------------- Depth bound --------------------


def test_length_never_exceeds_bound():
    history = HistoryLog(_state("init"), max_steps=3)

    for i in range(10):
        history.capture(_state(f"S{i}"))
        assert history.length() <= 4
        assert history.current_index() == history.length() - 1

    assert _titles(history.undo()) == ["S8"]
    assert _titles(history.undo()) == ["S7"]
    assert _titles(history.undo()) == ["S6"]
    assert history.undo() is None


def test_bound_holds_across_undo_and_capture():
    history = HistoryLog(_state("init"), max_steps=2)
    for i in range(4):
        history.capture(_state(f"S{i}"))

    assert history.can_undo() is True
    history.undo()
    history.capture(_state("X"))

    assert history.length() == 3
    assert history.current_index() == 2
    assert history.can_redo() is False


def test_zero_depth_disables_undo():
    history = HistoryLog(_state("A"), max_steps=0)
    history.capture(_state("B"))
    history.capture(_state("C"))

    assert history.length() == 1
    assert history.current_index() == 0
    assert history.can_undo() is False
    assert history.undo() is None
    assert _titles(history.current()) == ["C"]


# -------------------- Isolation --------------------


def test_initial_state_is_copied():
    live = _state("Original")
    history = HistoryLog(live)

    live.nodes[0] = live.nodes[0].with_content(NodeContent.create(title="Mutated", color="#000"))
    live.nodes.append(
        Node(
            id=GraphStore.generate_node_id(),
            position=Position(x=0.0, y=0.0),
            content=NodeContent.create("New", "#000"),
        )
    )

    history.capture(GraphState.empty())
    restored = history.undo()

    assert _titles(restored) == ["Original"]


def test_live_edits_after_capture_do_not_leak_into_history():
    live = _state("A")
    history = HistoryLog(GraphState.empty())
    history.capture(live)
    history.capture(GraphState.empty())

    live.nodes[0] = live.nodes[0].with_content(NodeContent.create(title="edited", color="#fff"))
    live.edges.append(Edge(id="e", source="0", target="0"))

    restored = history.undo()
    assert _titles(restored) == ["A"]
    assert restored.edges == []


def test_returned_snapshots_are_independent():
    history = HistoryLog(_state("A"))
    history.capture(_state("B"))

    first = history.undo()
    first.nodes.clear()
    first.edges.append(Edge(id="e", source="x", target="y"))

    history.redo()
    second = history.undo()

    assert _titles(second) == ["A"]
    assert second.edges == []
    assert second is not first


def test_clone_state_shares_no_substructure():
    state = GraphState(
        nodes=[
            Node(
                id="1",
                position=Position(x=1.0, y=2.0),
                content=NodeContent.create(title="T", color="#000", description="d"),
            )
        ],
        edges=[Edge(id="e", source="1", target="1")],
    )

    copy = clone_state(state)

    assert copy == state
    assert copy.nodes is not state.nodes
    assert copy.edges is not state.edges
    assert copy.nodes[0] is not state.nodes[0]
    assert copy.nodes[0].content is not state.nodes[0].content
    assert copy.nodes[0].position is not state.nodes[0].position
    assert copy.edges[0] is not state.edges[0]


def test_depth_is_fixed_after_construction():
    history = HistoryLog(_state("A"), max_steps=4)

    with pytest.raises(AttributeError):
        history.max_steps = 1

    for i in range(6):
        history.capture(_state(f"S{i}"))

    assert history.max_steps == 4
    assert history.length() == 5
