"""
Spinner Widget
Slot-machine style display for a single column of words.

The spinner steps through its words on a single-shot QTimer. The first ticks
run at full speed, the last few slow down until it settles on the target word.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from bofhexcuses.model.errors import IndexOutOfRangeError

logger = logging.getLogger(__name__)


class SpinnerWidget(QFrame):
    # Emitted with the final index when a spin comes to rest
    stopped = Signal(int)

    MIN_TICKS: int = 15
    SLOWDOWN_TICKS: int = 10
    TICK_INTERVAL_MS: int = 30
    SLOWDOWN_STEP_MS: int = 25

    def __init__(self, words: Sequence[str], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.words: tuple[str, ...] = tuple(words)
        self._index: int = 0
        self._ticks_left: int = 0

        self.setFrameShape(QFrame.Panel)
        self.setFrameShadow(QFrame.Sunken)
        self.setLineWidth(2)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)

        self.lbl_word = QLabel()
        self.lbl_word.setAlignment(Qt.AlignCenter)
        font = QFont("Courier New", 14)
        font.setBold(True)
        self.lbl_word.setFont(font)
        layout.addWidget(self.lbl_word)

        # Reserve room for the longest word so the layout does not jump while spinning
        if self.words:
            metrics = self.lbl_word.fontMetrics()
            self.lbl_word.setMinimumWidth(max(metrics.horizontalAdvance(w) for w in self.words) + 8)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_tick)

        self._refresh()

    # --- PROPERTIES ---

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_word(self) -> Optional[str]:
        return self.words[self._index] if self.words else None

    def is_spinning(self) -> bool:
        return self._ticks_left > 0

    # --- CONTROL ---

    def set_index(self, index: int) -> None:
        """Jumps straight to ``index``, cancelling any spin in progress."""
        if not 0 <= index < len(self.words):
            raise IndexOutOfRangeError(
                f"Spinner index {index} out of range [0, {len(self.words)})",
                index=index, limit=len(self.words))
        self._timer.stop()
        self._ticks_left = 0
        self._index = index
        self._refresh()

    def spin(self, rng: np.random.Generator) -> bool:
        """
        Starts spinning towards a random word drawn from ``rng``.

        Returns False (and does nothing) if already spinning or empty.
        """
        if self.is_spinning() or not self.words:
            return False

        count = len(self.words)
        target = int(rng.integers(count))
        ticks = (target - self._index) % count
        while ticks < self.MIN_TICKS:
            ticks += count

        logger.debug(f"Spinning to index {target} in {ticks} ticks.")
        self._ticks_left = ticks
        self._timer.start(self.TICK_INTERVAL_MS)
        return True

    # --- INTERNALS ---

    def _on_tick(self) -> None:
        self._index = (self._index + 1) % len(self.words)
        self._ticks_left -= 1
        self._refresh()

        if self._ticks_left == 0:
            self.stopped.emit(self._index)
            return

        interval = self.TICK_INTERVAL_MS
        if self._ticks_left < self.SLOWDOWN_TICKS:
            interval += (self.SLOWDOWN_TICKS - self._ticks_left) * self.SLOWDOWN_STEP_MS
        self._timer.start(interval)

    def _refresh(self) -> None:
        self.lbl_word.setText(self.current_word or "")
