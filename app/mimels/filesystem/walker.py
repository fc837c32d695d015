"""Depth-first physical directory walk.

Walks a tree in pre-order with an explicit stack, never following
symbolic links. Every node is reported to a visitor, which steers the
walk with a WalkSignal; raising from the visitor aborts the walk.
"""

import logging
import os
from collections.abc import Callable

from mimels.errors import RootAccessError
from mimels.filesystem.models import EntryKind, VisitedEntry, WalkSignal

logger = logging.getLogger(__name__)

Visitor = Callable[[VisitedEntry], WalkSignal]


def walk(root: str, visitor: Visitor) -> None:
    """Walk the tree rooted at root, calling visitor on every node.

    The root itself is visited first. A directory is visited before its
    children, and each child subtree is finished before the next
    sibling is visited. Children are visited in name order.

    A directory that cannot be listed is reported once as an UNREADABLE
    entry instead of a DIRECTORY entry. A child that cannot be stat-ed
    is reported as UNREADABLE as well. Neither stops the walk.

    Args:
        root: Path to start from.
        visitor: Called once per node; returns CONTINUE or SKIP_SUBTREE.

    Raises:
        RootAccessError: If the root cannot be stat-ed.
    """
    try:
        st = os.lstat(root)
    except OSError as e:
        raise RootAccessError(root, e) from e

    stack: list[VisitedEntry] = [
        VisitedEntry(path=root, kind=EntryKind.from_mode(st.st_mode), size=st.st_size)
    ]

    while stack:
        entry = stack.pop()

        if entry.kind != EntryKind.DIRECTORY:
            visitor(entry)
            continue

        try:
            names = _list_dir(entry.path)
        except OSError as e:
            logger.debug("Cannot list directory %s: %s", entry.path, e)
            visitor(_unreadable(entry.path, e))
            continue

        if visitor(entry) == WalkSignal.SKIP_SUBTREE:
            continue

        # Reversed so the first name is popped first
        for name in reversed(names):
            stack.append(_stat_entry(os.path.join(entry.path, name)))


def _list_dir(path: str) -> list[str]:
    """Return the sorted child names of a directory."""
    with os.scandir(path) as it:
        return sorted(child.name for child in it)


def _stat_entry(path: str) -> VisitedEntry:
    """Build a VisitedEntry from lstat, or an UNREADABLE one on failure."""
    try:
        st = os.lstat(path)
    except OSError as e:
        return _unreadable(path, e)
    return VisitedEntry(path=path, kind=EntryKind.from_mode(st.st_mode), size=st.st_size)


def _unreadable(path: str, error: OSError) -> VisitedEntry:
    return VisitedEntry(
        path=path,
        kind=EntryKind.UNREADABLE,
        error=error.strerror or str(error),
    )
