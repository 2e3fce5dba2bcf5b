from __future__ import annotations

import logging
from typing import List, Optional

from mindgraph.graph.graph_schema import GraphState
from mindgraph.history.snapshot import clone_state

DEFAULT_MAX_STEPS = 16

logger = logging.getLogger("mindgraph.history")


class HistoryLog:
    """
    Bounded linear undo/redo log of graph snapshots.

    The log always holds at least one entry. Capturing after an undo
    discards every entry past the current index, so the abandoned redo
    path cannot be reached again. Snapshots are cloned on the way in
    and on the way out.

    With max_steps == 0 the log keeps only the latest captured state
    and undo is never available.
    """

    def __init__(
        self,
        initial_state: GraphState,
        max_steps: int = DEFAULT_MAX_STEPS,
    ) -> None:
        if max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {max_steps}")

        self._max_steps = max_steps
        self._entries: List[GraphState] = [clone_state(initial_state)]
        self._index = 0

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def capture(self, state: GraphState) -> None:
        discarded = len(self._entries) - (self._index + 1)
        if discarded:
            logger.debug("branch cleared: %s redo entries dropped", discarded)

        self._entries = self._entries[: self._index + 1]
        self._entries.append(clone_state(state))

        if len(self._entries) > self._max_steps + 1:
            # index already points at the new last entry once the oldest goes
            self._entries.pop(0)
            logger.debug("oldest entry trimmed (max_steps=%s)", self._max_steps)
        else:
            self._index = min(self._index + 1, self._max_steps)

        logger.debug(
            "captured: index=%s length=%s",
            self._index,
            len(self._entries),
        )

    def undo(self) -> Optional[GraphState]:
        if self._index <= 0:
            return None

        self._index -= 1
        return clone_state(self._entries[self._index])

    def redo(self) -> Optional[GraphState]:
        if self._index >= len(self._entries) - 1:
            return None

        self._index += 1
        return clone_state(self._entries[self._index])

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def max_steps(self) -> int:
        return self._max_steps

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def length(self) -> int:
        return len(self._entries)

    def current_index(self) -> int:
        return self._index

    def current(self) -> GraphState:
        return clone_state(self._entries[self._index])

    def __len__(self) -> int:
        return len(self._entries)
