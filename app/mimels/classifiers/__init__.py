"""Content-type classifiers.

This module exports the classifier interface and its libmagic
implementation.
"""

from mimels.classifiers.base import Classifier
from mimels.classifiers.libmagic import MagicClassifier

__all__ = ["Classifier", "MagicClassifier"]
