"""Sorted output of the aggregation index.

Lines are written as bytes so that paths which are not valid UTF-8
reach the output exactly as the filesystem returned them.
"""

import os
from typing import BinaryIO

from mimels.core.config import OutputFormat, Settings
from mimels.core.index import AggregationIndex
from mimels.errors import NothingToListError


class SortedEmitter:
    """Writes every recorded entry, grouped and ordered by label.

    Args:
        settings: Run settings (output format and line terminator).
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._terminator = settings.terminator.encode()

    def format_line(self, label: str, path: str) -> bytes:
        """Format one output line, terminator included.

        Args:
            label: Content-type label of the entry.
            path: Entry path.

        Returns:
            Encoded line.
        """
        name = os.fsencode(path)
        if self._settings.output_format == OutputFormat.MIME:
            return os.fsencode(label) + b": " + name + self._terminator
        return name + self._terminator

    def emit(self, index: AggregationIndex, stream: BinaryIO) -> int:
        """Write all entries of the index to a binary stream.

        Args:
            index: Fully populated aggregation index.
            stream: Destination stream (e.g. sys.stdout.buffer).

        Returns:
            Number of lines written.

        Raises:
            NothingToListError: If the index holds no entries.
        """
        if not index:
            raise NothingToListError

        count = 0
        for label, paths in index.ordered_walk():
            for path in paths:
                stream.write(self.format_line(label, path))
                count += 1

        stream.flush()
        return count
