"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from mimels.classifiers.base import Classifier
from mimels.core.config import Settings
from mimels.errors import ClassificationError


class FakeClassifier(Classifier):
    """Classifier labelling files by suffix, recording every call."""

    LABELS = {
        ".txt": "text/plain; charset=us-ascii",
        ".py": "text/x-script.python; charset=us-ascii",
        ".png": "image/png; charset=binary",
        ".json": "application/json; charset=us-ascii",
    }

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.calls: list[str] = []
        self._fail_on = fail_on or set()

    def classify(self, path: str) -> str:
        self.calls.append(path)
        if Path(path).name in self._fail_on:
            raise ClassificationError(path, "could not find any valid magic files!")
        return self.LABELS.get(Path(path).suffix, "application/octet-stream; charset=binary")


@pytest.fixture
def classifier() -> FakeClassifier:
    """Fresh fake classifier."""
    return FakeClassifier()


@pytest.fixture
def settings() -> Settings:
    """Default settings."""
    return Settings()


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small tree with text, empty, hidden and linked entries.

    Layout:
        root/
            a.txt          "hello"
            empty.txt      (0 bytes)
            src/
                main.py    "print()"
                notes.txt  "notes"
            .git/
                config     "[core]"
            .hidden.txt    "secret"
            link -> a.txt
            broken -> missing
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "empty.txt").write_text("")
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("print()")
    (root / "src" / "notes.txt").write_text("notes")
    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("[core]")
    (root / ".hidden.txt").write_text("secret")
    (root / "link").symlink_to("a.txt")
    (root / "broken").symlink_to("missing")
    return root


@pytest.fixture
def failing_classifier() -> FakeClassifier:
    """Fake classifier that fails on any file named main.py."""
    return FakeClassifier(fail_on={"main.py"})
