"""Abstract base class for content-type classifiers.

This module defines the Classifier interface the entry policy uses to
label regular, non-empty files.
"""

from abc import ABC, abstractmethod


class Classifier(ABC):
    """Abstract base class for all content-type classifiers.

    A classifier is asked at most once per regular, non-empty file. It
    is never asked about symbolic links, directories or empty files.

    Example:
        >>> classifier = MagicClassifier()
        >>> classifier.classify("README.md")
        'text/plain; charset=us-ascii'
    """

    @abstractmethod
    def classify(self, path: str) -> str:
        """Return the content-type label of a file.

        Args:
            path: Path to a regular, non-empty file.

        Returns:
            Content-type label, e.g. "text/plain; charset=us-ascii".

        Raises:
            ClassificationError: If the content type cannot be determined.
        """
