"""Traversal driver.

Walks each root in the order given and feeds every visited entry
through the entry policy into the aggregation index.
"""

import logging
from collections.abc import Sequence

from mimels.core.config import Settings
from mimels.core.index import AggregationIndex
from mimels.errors import RootAccessError
from mimels.filesystem.models import Outcome, VisitedEntry, WalkSignal
from mimels.filesystem.policy import EntryPolicy
from mimels.filesystem.walker import walk
from mimels.utils.formatting import print_warning

logger = logging.getLogger(__name__)

DEFAULT_ROOT = "."


class TraversalDriver:
    """Drives the depth-first walk of one or more roots.

    Args:
        settings: Run settings.
        policy: Entry policy deciding what to record.
        index: Aggregation index receiving recorded entries.
    """

    def __init__(self, settings: Settings, policy: EntryPolicy, index: AggregationIndex) -> None:
        self._settings = settings
        self._policy = policy
        self._index = index

    def scan(self, roots: Sequence[str] = ()) -> int:
        """Walk all roots and record their entries.

        Args:
            roots: Root paths, processed in order. Empty means the
                current directory.

        Returns:
            Number of entries recorded by this call.

        Raises:
            RootAccessError: If a root cannot be accessed and
                ignore_inaccessible is not set.
            ClassificationError: If a file cannot be classified.
        """
        before = len(self._index)

        for root in roots or (DEFAULT_ROOT,):
            logger.debug("Scanning %s", root)
            try:
                walk(root, self._visit)
            except RootAccessError as e:
                if not self._settings.ignore_inaccessible:
                    raise
                print_warning(str(e))

        recorded = len(self._index) - before
        logger.debug("Recorded %d entries", recorded)
        return recorded

    def _visit(self, entry: VisitedEntry) -> WalkSignal:
        outcome = self._policy.decide(entry)

        if outcome == Outcome.SKIP_SUBTREE:
            return WalkSignal.SKIP_SUBTREE

        if outcome == Outcome.CLASSIFY_AND_RECORD:
            label = self._policy.resolve_label(entry)
            self._index.insert(label, entry.path)

        return WalkSignal.CONTINUE
