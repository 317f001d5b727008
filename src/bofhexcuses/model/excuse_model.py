"""
Excuse Model
============
Multi-column word model behind the generator.

Why is this file needed?
------------------------
1. Data: It owns the word columns. One word from each column makes an excuse.
2. Selection: It turns a list of indices (or a random draw) into an Excuse.
3. Decoupling: The views only ever read from this object; nothing writes to
   it after construction, so it can be shared freely.

Classes:
    ExcuseModel: Immutable ordered collection of columns.
"""
from __future__ import annotations

import logging
import operator
from typing import Iterator, Sequence, Union

import numpy as np

from bofhexcuses.config import COMMENT_PREFIX, DEFAULT_COLUMN_FILES
from bofhexcuses.model.errors import IndexOutOfRangeError
from bofhexcuses.model.excuse import Excuse
from bofhexcuses.model.io import Source, WordListIO

logger = logging.getLogger(__name__)

Column = tuple[str, ...]
RandomSource = Union[np.random.Generator, int, None]


class ExcuseModel:
    """
    Immutable ordered sequence of word columns.

    Build it with ``load`` (word-list files), ``default`` (the bundled classic
    lists) or ``from_columns`` (literal data).
    """
    __slots__ = ("_columns",)

    def __init__(self, columns: Sequence[Sequence[str]] = ()) -> None:
        # Both levels are copied
        object.__setattr__(self, "_columns", tuple(tuple(column) for column in columns))

    # --- CONSTRUCTION ---

    @classmethod
    def load(cls, sources: Sequence[Source], comment_prefix: str = COMMENT_PREFIX) -> ExcuseModel:
        """
        Loads one column per source, in source order.

        Raises:
            ResourceNotFoundError: If any source is missing or unreadable.
                No model is created in that case.
        """
        model = cls(WordListIO.load_columns(sources, comment_prefix))
        logger.info(f"Excuse model loaded: {model.column_count()} columns, "
                    f"{model.combination_count()} possible excuses.")
        return model

    @classmethod
    def default(cls, comment_prefix: str = COMMENT_PREFIX) -> ExcuseModel:
        """The classic four-column model from the bundled word lists."""
        return cls.load(DEFAULT_COLUMN_FILES, comment_prefix)

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[str]]) -> ExcuseModel:
        return cls(columns)

    # --- QUERIES ---

    def column_count(self) -> int:
        return len(self._columns)

    def column(self, index: int) -> Column:
        """Returns the words of column ``index``; negative indices are rejected."""
        index = operator.index(index)
        if not 0 <= index < len(self._columns):
            raise IndexOutOfRangeError(
                f"Column index {index} out of range [0, {len(self._columns)})",
                index=index, limit=len(self._columns))
        return self._columns[index]

    def column_iterator(self, index: int) -> Iterator[str]:
        return iter(self.column(index))

    def combination_count(self) -> int:
        """Number of distinct index selections (product of the column lengths)."""
        count = 1
        for column in self._columns:
            count *= len(column)
        return count

    def excuse_at(self, indices: Sequence[int]) -> Excuse:
        """
        Builds the excuse made of ``column(i)[indices[i]]`` for every column.

        Raises:
            IndexOutOfRangeError: If ``len(indices)`` differs from the column
                count or any index falls outside its column.
        """
        if len(indices) != len(self._columns):
            raise IndexOutOfRangeError(
                f"Expected {len(self._columns)} indices, got {len(indices)}",
                index=len(indices), limit=len(self._columns))

        words = []
        for position, (column, index) in enumerate(zip(self._columns, indices)):
            index = operator.index(index)
            if not 0 <= index < len(column):
                raise IndexOutOfRangeError(
                    f"Index {index} out of range [0, {len(column)}) for column {position}",
                    index=index, limit=len(column))
            words.append(column[index])

        return Excuse(words, self)

    def random_indices(self, rng: RandomSource = None) -> list[int]:
        """
        Draws one uniform index per column.

        ``rng`` is anything with a Generator-style ``integers(high)`` method
        (a ``numpy.random.Generator`` or a test double), an integer seed, or
        None for a fresh unseeded generator.
        """
        if rng is None or isinstance(rng, (int, np.integer)):
            rng = np.random.default_rng(rng)
        indices = []
        for position, column in enumerate(self._columns):
            if not column:
                raise IndexOutOfRangeError(
                    f"Column {position} is empty, no word can be selected",
                    index=0, limit=0)
            indices.append(int(rng.integers(len(column))))
        return indices

    def random_excuse(self, rng: RandomSource = None) -> Excuse:
        return self.excuse_at(self.random_indices(rng))

    # --- PROTOCOLS ---

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExcuseModel):
            return NotImplemented
        return self._columns == other._columns

    def __hash__(self) -> int:
        return hash(self._columns)

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # copy and pickle rebuild through __init__ instead of setattr
        return type(self), (self._columns,)

    def __repr__(self) -> str:
        columns = ", ".join(f"column_{i}={list(column)!r}" for i, column in enumerate(self._columns))
        if columns:
            columns = ", " + columns
        return f"{type(self).__name__}(column_count={len(self._columns)}{columns})"
