"""Filesystem domain models for the directory walk.

This module defines the data structures passed between the walk
primitive, the entry policy, and the traversal driver: entry kinds,
visited entries, walk control signals, and policy outcomes.
"""

import os
import stat
from dataclasses import dataclass
from enum import Enum

# Fixed labels substituted for entries that are never classified
EMPTY_FILE_LABEL = "inode/x-empty; charset=binary"
SYMLINK_LABEL = "inode/symlink"


class EntryKind(str, Enum):
    """Type of a visited filesystem entry, as reported by lstat.

    Attributes:
        FILE: Regular file.
        DIRECTORY: Directory.
        SYMLINK: Symbolic link (live or broken, never followed).
        OTHER: Device, socket, FIFO or any other node kind.
        UNREADABLE: Entry that could not be stat-ed, or a directory
            that could not be listed.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
    UNREADABLE = "unreadable"

    @classmethod
    def from_mode(cls, mode: int) -> "EntryKind":
        """Map an st_mode value to an entry kind."""
        if stat.S_ISREG(mode):
            return cls.FILE
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        return cls.OTHER


class WalkSignal(str, Enum):
    """Value returned by a walk visitor to steer the traversal.

    Aborting the whole walk is done by raising from the visitor.
    """

    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"


class Outcome(str, Enum):
    """Decision of the entry policy for a single visited entry."""

    SKIP = "skip"
    SKIP_SUBTREE = "skip_subtree"
    CLASSIFY_AND_RECORD = "classify_and_record"


@dataclass(frozen=True, slots=True)
class VisitedEntry:
    """A filesystem node observed once during the walk.

    Attributes:
        path: Path as built by the walk (root joined with child names).
        kind: Entry kind from lstat.
        size: Size in bytes from lstat (0 when unavailable).
        error: Reason the entry is unreadable, if it is.
    """

    path: str
    kind: EntryKind
    size: int = 0
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)

    @property
    def name(self) -> str:
        """Base name of the entry.

        Trailing separators are ignored, so a root given as "dir/"
        has the name "dir".
        """
        stripped = self.path.rstrip(os.sep)
        if not stripped:
            return self.path
        return os.path.basename(stripped)

    @property
    def is_hidden(self) -> bool:
        """True if the base name starts with a dot."""
        return self.name.startswith(".")

    @property
    def is_dot_ref(self) -> bool:
        """True if the base name is exactly "." or ".."."""
        return self.name in (".", "..")
