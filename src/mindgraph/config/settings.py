from __future__ import annotations

from dataclasses import dataclass, field

# ---------------------------------------------------------------------
# Undo / redo history
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class HistoryConfig:
    """
    Controls how many undo steps the editor keeps.

    max_steps == 0 disables undo; negative values are rejected when the
    history log is constructed.
    """

    max_steps: int = 16


# ---------------------------------------------------------------------
# Editing session
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class EditorConfig:
    """
    Controls how an editing session is set up.
    """

    history: HistoryConfig = field(default_factory=HistoryConfig)
    seed_sample_graph: bool = True


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class MindgraphConfig:
    """
    Root configuration object for mindgraph.

    Constructed explicitly and passed to the session; treated as
    immutable policy.
    """

    editor: EditorConfig = field(default_factory=EditorConfig)
