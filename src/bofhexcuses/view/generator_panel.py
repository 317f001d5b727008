"""
Excuse Generator Panel
======================
The central widget: a big "Generate!" button on top, one column panel per
model column side by side, and the assembled excuse underneath.

Why is this file needed?
------------------------
1. Layout: It builds one ColumnPanel per column of the ExcuseModel.
2. Routing: It spins every column on request and reports the resulting
   excuse once all spinners have come to rest.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional

import numpy as np
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from bofhexcuses.model.excuse import Excuse
from bofhexcuses.model.excuse_model import ExcuseModel
from bofhexcuses.view.widgets.column_panel import ColumnPanel

logger = logging.getLogger(__name__)


class ExcuseGeneratorPanel(QFrame):
    # Emitted with the excuse text whenever every spinner is at rest after a change
    excuse_changed = Signal(str)

    def __init__(self, model: ExcuseModel, rng: Optional[np.random.Generator] = None,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.model: ExcuseModel = model
        self.rng: np.random.Generator = np.random.default_rng(rng)

        self.setFrameShape(QFrame.Panel)
        self.setFrameShadow(QFrame.Raised)

        layout = QVBoxLayout(self)

        # --- 1. BIG BUTTON ---
        self.btn_generate = QPushButton("Generate!")
        self.btn_generate.setMinimumHeight(40)
        self.btn_generate.clicked.connect(self.spin_all)
        layout.addWidget(self.btn_generate)

        # --- 2. COLUMNS ---
        column_row = QHBoxLayout()
        column_row.setSpacing(4)
        self.columns: list[ColumnPanel] = []
        for words in self.model:
            panel = ColumnPanel(words, self.rng)
            panel.spinner.stopped.connect(self._on_spinner_stopped)
            column_row.addWidget(panel, stretch=1)
            self.columns.append(panel)
        layout.addLayout(column_row)

        # --- 3. RESULT ---
        self.lbl_excuse = QLabel()
        self.lbl_excuse.setAlignment(Qt.AlignCenter)
        self.lbl_excuse.setWordWrap(True)
        self.lbl_excuse.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.lbl_excuse.setStyleSheet("font-weight: bold;")
        layout.addWidget(self.lbl_excuse)

        self._update_excuse_label()

    def __iter__(self) -> Iterator[ColumnPanel]:
        return iter(self.columns)

    def column_count(self) -> int:
        return self.model.column_count()

    def column(self, index: int) -> ColumnPanel:
        return self.columns[index]

    # --- STATE ---

    def is_spinning(self) -> bool:
        return any(column.spinner.is_spinning() for column in self.columns)

    def current_indices(self) -> list[int]:
        return [column.spinner.current_index for column in self.columns]

    def current_excuse(self) -> Excuse:
        """The excuse currently shown. Raises IndexOutOfRangeError if a column is empty."""
        return self.model.excuse_at(self.current_indices())

    def show_indices(self, indices: list[int]) -> None:
        """Moves every spinner straight to ``indices`` without animation."""
        # Validate the whole selection before touching any spinner
        excuse = self.model.excuse_at(indices)
        for column, index in zip(self.columns, indices):
            column.spinner.set_index(index)
        self._publish(excuse)

    # --- ACTIONS ---

    def spin_all(self) -> None:
        """Spins every column that is not already spinning."""
        started = sum(1 for column in self.columns if column.spin())
        logger.debug(f"Spinning {started} of {len(self.columns)} columns.")

    def _on_spinner_stopped(self, _index: int) -> None:
        if not self.is_spinning():
            self._update_excuse_label()
            self.excuse_changed.emit(self.lbl_excuse.text())

    def _update_excuse_label(self) -> None:
        if all(column.spinner.words for column in self.columns):
            self.lbl_excuse.setText(self.current_excuse().text() or "")
        else:
            self.lbl_excuse.setText("")

    def _publish(self, excuse: Excuse) -> None:
        text = excuse.text() or ""
        self.lbl_excuse.setText(text)
        self.excuse_changed.emit(text)
