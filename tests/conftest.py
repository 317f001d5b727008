"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from typing import List

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from bofhexcuses.model.excuse_model import ExcuseModel


@pytest.fixture
def sample_columns() -> List[List[str]]:
    """Three small columns of different lengths."""
    return [
        ["Temporary", "Intermittent", "Partial"],
        ["Power", "Drive"],
        ["Interruption", "Feed", "Leak", "Overload"],
    ]


@pytest.fixture
def sample_model(sample_columns) -> ExcuseModel:
    return ExcuseModel.from_columns(sample_columns)


@pytest.fixture
def word_list_file(tmp_path: Path) -> Path:
    """A word list mixing comments, blank lines and padded entries."""
    path = tmp_path / "column.txt"
    path.write_text(
        "# leading comment\n"
        "\n"
        "  Temporary  \n"
        "\t\n"
        "Intermittent\n"
        "   # indented comment\n"
        "Partial Power\n"
        "#Trailing\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for every widget test."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
