"""Aggregation index of visited entries grouped by content type.

The index maps each content-type label to a bucket of entry paths.
Buckets live in a SortedDict, so the ordered walk needs no separate sort
pass: creating a bucket for a new label costs O(log n), and later
insertions for the same label are a plain dictionary lookup.
"""

from collections import deque
from collections.abc import Callable, Iterator

from sortedcontainers import SortedDict

from mimels.core.config import BucketOrder


class AggregationIndex:
    """Ordered map from content-type label to a bucket of paths.

    Buckets are created on the first insertion for a label and are
    never removed. Within a bucket, paths are kept newest-first by
    default (each insertion goes to the front), or in discovery order.

    Example:
        >>> index = AggregationIndex()
        >>> index.insert("text/plain; charset=us-ascii", "./a.txt")
        >>> index.insert("inode/symlink", "./link")
        >>> [label for label, _ in index.ordered_walk()]
        ['inode/symlink', 'text/plain; charset=us-ascii']
    """

    def __init__(self, order: BucketOrder = BucketOrder.NEWEST_FIRST) -> None:
        self._order = order
        self._buckets: dict[str, deque[str]] = SortedDict()
        self._size = 0

    @property
    def order(self) -> BucketOrder:
        """Order of paths within each bucket."""
        return self._order

    @property
    def label_count(self) -> int:
        """Number of distinct labels (buckets)."""
        return len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, label: object) -> bool:
        return label in self._buckets

    def labels(self) -> list[str]:
        """Return all labels in ascending order."""
        return list(self._buckets)

    def insert(self, label: str, path: str) -> None:
        """Record a path under a content-type label.

        Creates the bucket if this is the first path seen for the label.

        Args:
            label: Content-type label.
            path: Entry path to store.
        """
        bucket = self._buckets.get(label)
        if bucket is None:
            bucket = deque()
            self._buckets[label] = bucket

        if self._order == BucketOrder.NEWEST_FIRST:
            bucket.appendleft(path)
        else:
            bucket.append(path)
        self._size += 1

    def bucket(self, label: str) -> list[str]:
        """Return a copy of the paths recorded for a label.

        Raises:
            KeyError: If no path was recorded under the label.
        """
        return list(self._buckets[label])

    def ordered_walk(self) -> Iterator[tuple[str, list[str]]]:
        """Yield every (label, paths) pair in ascending label order.

        Yields:
            Tuples of label and a copy of its bucket.
        """
        for label, bucket in self._buckets.items():
            yield label, list(bucket)

    def visit(self, visitor: Callable[[str, list[str]], None]) -> None:
        """Call visitor once per (label, paths) pair in ascending label order."""
        for label, paths in self.ordered_walk():
            visitor(label, paths)
