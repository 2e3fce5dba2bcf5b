"""
Editing session: the thin layer between the pure graph/history core
and whatever renders the canvas.
"""

from mindgraph.session.changes import NodeChange, EdgeChange
from mindgraph.session.editor_session import EditorSession
from mindgraph.session.sample_graph import sample_graph

__all__ = [
    "NodeChange",
    "EdgeChange",
    "EditorSession",
    "sample_graph",
]
