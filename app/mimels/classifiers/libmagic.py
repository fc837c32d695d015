"""libmagic-backed content-type classifier.

Uses python-magic configured for full MIME output, so labels look like
"text/plain; charset=us-ascii" (type and encoding, as `file --mime`).
"""

import logging
from pathlib import Path

from mimels.classifiers.base import Classifier
from mimels.errors import ClassificationError, ClassifierInitError

logger = logging.getLogger(__name__)


class MagicClassifier(Classifier):
    """Classifies files by content using the libmagic database.

    Args:
        magic_file: Custom compiled magic database. If None, the system
            default database is loaded.

    Raises:
        ClassifierInitError: If libmagic or its database cannot be loaded.
    """

    def __init__(self, magic_file: Path | None = None) -> None:
        try:
            import magic
        except ImportError as e:
            msg = f"Failed to initialise libmagic: {e}"
            raise ClassifierInitError(msg) from e

        self._errors: tuple[type[Exception], ...] = (magic.MagicException, OSError)
        database = str(magic_file) if magic_file is not None else None

        try:
            self._magic = magic.Magic(mime=True, mime_encoding=True, magic_file=database)
        except magic.MagicException as e:
            msg = f"Failed to load libmagic database: {_describe(e)}"
            raise ClassifierInitError(msg) from e

        logger.debug("Loaded libmagic database: %s", database or "default")

    def classify(self, path: str) -> str:
        """Return the MIME type and encoding of a file.

        Args:
            path: Path to a regular, non-empty file.

        Returns:
            Label such as "application/pdf; charset=binary".

        Raises:
            ClassificationError: If libmagic cannot classify the file.
        """
        try:
            label = self._magic.from_file(path)
        except self._errors as e:
            raise ClassificationError(path, _describe(e)) from e

        if not label:
            raise ClassificationError(path, "empty result")
        return label


def _describe(error: Exception) -> str:
    """Human-readable reason for a libmagic or OS failure."""
    if isinstance(error, OSError):
        return error.strerror or str(error)
    message = getattr(error, "message", None)
    if isinstance(message, bytes):
        return message.decode(errors="replace")
    return str(message or error)
