"""Per-entry policy for the directory walk.

Decides, for each visited entry, whether it is skipped, whether its
subtree is pruned, or whether it is classified and recorded, and
resolves the content-type label of recorded entries.
"""

import logging

from mimels.classifiers.base import Classifier
from mimels.core.config import Settings
from mimels.filesystem.models import (
    EMPTY_FILE_LABEL,
    SYMLINK_LABEL,
    EntryKind,
    Outcome,
    VisitedEntry,
)
from mimels.utils.formatting import print_warning

logger = logging.getLogger(__name__)


class EntryPolicy:
    """Dispatches visited entries to skip, prune or record.

    Rules, evaluated in order:
    1. Unreadable entries are reported with a warning and skipped.
    2. "." and ".." (only possible as root arguments) are skipped.
    3. Hidden entries are skipped unless show_hidden is set; a hidden
       directory has its whole subtree pruned.
    4. Regular files and symbolic links are recorded.
    5. Directories are descended into but never recorded.
    6. Any other node kind is skipped.

    Args:
        settings: Run settings.
        classifier: Content-type classifier for regular, non-empty files.
    """

    def __init__(self, settings: Settings, classifier: Classifier) -> None:
        self._settings = settings
        self._classifier = classifier

    def decide(self, entry: VisitedEntry) -> Outcome:
        """Decide what to do with a visited entry.

        Args:
            entry: Entry reported by the walk.

        Returns:
            Outcome for the entry.
        """
        if entry.kind == EntryKind.UNREADABLE:
            print_warning(f"Permission denied: {entry.path}")
            return Outcome.SKIP

        if entry.is_dot_ref:
            return Outcome.SKIP

        if entry.is_hidden and not self._settings.show_hidden:
            if entry.kind == EntryKind.DIRECTORY:
                return Outcome.SKIP_SUBTREE
            return Outcome.SKIP

        if entry.kind in (EntryKind.FILE, EntryKind.SYMLINK):
            return Outcome.CLASSIFY_AND_RECORD

        return Outcome.SKIP

    def resolve_label(self, entry: VisitedEntry) -> str:
        """Return the content-type label for a recorded entry.

        Symbolic links are never dereferenced and empty files are never
        opened; both get a fixed label. Everything else goes through the
        classifier.

        Args:
            entry: Regular file or symbolic link.

        Returns:
            Content-type label.

        Raises:
            ClassificationError: If the classifier fails.
        """
        if entry.kind == EntryKind.SYMLINK:
            return SYMLINK_LABEL

        if entry.size == 0:
            return EMPTY_FILE_LABEL

        label = self._classifier.classify(entry.path)
        logger.debug("%s: %s", entry.path, label)
        return label
