"""
Column Panel
A spinner for one column plus a small button that spins only that column.
"""
from typing import Optional, Sequence

import numpy as np
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QPushButton, QVBoxLayout, QWidget

from bofhexcuses.view.widgets.spinner import SpinnerWidget


class ColumnPanel(QWidget):
    def __init__(self, words: Sequence[str], rng: np.random.Generator,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.rng = rng

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.spinner = SpinnerWidget(words)
        layout.addWidget(self.spinner, stretch=1)

        # Small and unobtrusive on purpose
        self.btn_spin = QPushButton("Spin!")
        font = QFont(self.btn_spin.font())
        font.setPointSizeF(8.0)
        self.btn_spin.setFont(font)
        self.btn_spin.setFlat(True)
        self.btn_spin.setEnabled(bool(self.spinner.words))
        self.btn_spin.clicked.connect(self.spin)
        layout.addWidget(self.btn_spin)

    def spin(self) -> bool:
        """Spins this column unless it is already spinning."""
        return self.spinner.spin(self.rng)
