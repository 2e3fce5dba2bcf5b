"""
Configuration layer for mindgraph.

Configuration in mindgraph is:
- Explicit (passed, not global)
- Typed (frozen dataclasses)
- Small (the history depth is the only tunable of the core)
"""

from mindgraph.config.settings import (
    HistoryConfig,
    EditorConfig,
    MindgraphConfig,
)

__all__ = [
    "HistoryConfig",
    "EditorConfig",
    "MindgraphConfig",
]
