"""
Undo/redo history for mindgraph.

Snapshots are full, independently owned copies of a graph state.
"""

from mindgraph.history.history_log import HistoryLog
from mindgraph.history.snapshot import clone_state

__all__ = [
    "HistoryLog",
    "clone_state",
]
