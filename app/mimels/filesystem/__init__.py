"""Filesystem traversal module.

This module provides the depth-first walk, the per-entry policy and
the traversal driver that fills the aggregation index.
"""

from mimels.filesystem.driver import TraversalDriver
from mimels.filesystem.models import (
    EMPTY_FILE_LABEL,
    SYMLINK_LABEL,
    EntryKind,
    Outcome,
    VisitedEntry,
    WalkSignal,
)
from mimels.filesystem.policy import EntryPolicy
from mimels.filesystem.walker import walk

__all__ = [
    "EMPTY_FILE_LABEL",
    "SYMLINK_LABEL",
    "EntryKind",
    "EntryPolicy",
    "Outcome",
    "TraversalDriver",
    "VisitedEntry",
    "WalkSignal",
    "walk",
]
