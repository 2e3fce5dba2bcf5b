"""
mindgraph
=========

Graph mutation and undo/redo core of a node diagram editor.

Core idea:
- Every edit derives a new graph value; history stores independent
  snapshots of those values.

Public API:
- GraphStore
- GraphState
- HistoryLog
- EditorSession
"""

from mindgraph.graph.graph_schema import GraphState
from mindgraph.graph.graph_store import GraphStore
from mindgraph.history.history_log import HistoryLog
from mindgraph.session.editor_session import EditorSession

__all__ = [
    "GraphStore",
    "GraphState",
    "HistoryLog",
    "EditorSession",
]

__version__ = "0.1.0"
