"""
Excuse
======
A BOFH excuse is a sequence of terms that, spoken in order, induces dummy mode
among the uninitiated. This module holds that sequence as an immutable value.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from bofhexcuses.model.excuse_model import ExcuseModel

Components = tuple[Optional[str], ...]


@dataclass(frozen=True)
class Excuse:
    """
    Immutable selection of one word per column.

    ``words`` is copied into a tuple on construction. ``model`` is the model
    the words were drawn from, or None for a standalone excuse.
    """
    words: Optional[Sequence[Optional[str]]]
    model: Optional[ExcuseModel] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.words is not None:
            object.__setattr__(self, "words", tuple(self.words))

    def components(self) -> Optional[Components]:
        return self.words

    def text(self) -> Optional[str]:
        """
        Space separated text of the excuse.

        A None component is skipped entirely. Any other component, the empty
        string included, is followed by one space unless it is the last
        component, so ``["A", None, "B", "", "C"]`` gives ``"A B  C"``.
        Returns None when the excuse has no component sequence at all.
        """
        if self.words is None:
            return None

        parts = []
        last = len(self.words) - 1
        for position, component in enumerate(self.words):
            if component is None:
                continue
            parts.append(component)
            if position != last:
                parts.append(" ")
        return "".join(parts)

    def __str__(self) -> str:
        text = self.text()
        return "" if text is None else text
