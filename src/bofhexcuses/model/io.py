"""
Input Manager (Word Lists)
Handles locating and reading the plain-text word lists behind each column.

Format: UTF-8 text, one word or phrase per line. Lines are trimmed; empty
lines and lines starting with the comment marker are skipped.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Sequence, Union

from bofhexcuses.config import COMMENT_PREFIX, WORDLISTS_PATH
from bofhexcuses.model.errors import ResourceNotFoundError

# Get module logger
logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]"]


class WordListIO:

    @staticmethod
    def parse_lines(lines: Iterable[str], comment_prefix: str = COMMENT_PREFIX) -> tuple[str, ...]:
        """Keeps the trimmed, non-blank, non-comment lines in their original order."""
        words = []
        for line in lines:
            line = line.strip()
            if not line or line.startswith(comment_prefix):
                continue
            words.append(line)
        return tuple(words)

    @staticmethod
    def resolve(source: Source) -> Path:
        """
        Finds the word list named by ``source``.

        An existing filesystem path wins. Anything else is looked up in the
        bundled word-list directory (``config.WORDLISTS_PATH``, which follows
        PyInstaller's ``sys._MEIPASS`` in a frozen build).
        """
        name = os.fspath(source)
        try:
            path = Path(name)
            if path.is_file():
                return path

            bundled = Path(WORDLISTS_PATH) / name
            if bundled.is_file():
                logger.debug(f"Resolved '{name}' to bundled word list {bundled}.")
                return bundled
        except (OSError, ValueError) as e:
            logger.exception(f"Cannot look up word list '{name}': {e}")
            raise ResourceNotFoundError(name, str(e)) from e

        msg = f"Word list '{name}' is neither a file nor a bundled resource."
        logger.error(msg)
        raise ResourceNotFoundError(name, "no such file or bundled resource")

    @staticmethod
    def read_column(source: Source, comment_prefix: str = COMMENT_PREFIX) -> tuple[str, ...]:
        resource = WordListIO.resolve(source)
        try:
            with resource.open("r", encoding="utf-8") as f:
                words = WordListIO.parse_lines(f, comment_prefix)
        except (OSError, UnicodeDecodeError) as e:
            logger.exception(f"Failed to read word list '{os.fspath(source)}': {e}")
            raise ResourceNotFoundError(os.fspath(source), str(e)) from e

        logger.debug(f"Read {len(words)} words from '{os.fspath(source)}'.")
        return words

    @staticmethod
    def load_columns(sources: Sequence[Source], comment_prefix: str = COMMENT_PREFIX) -> list[tuple[str, ...]]:
        """Reads every source in order; the first failure aborts the whole load."""
        logger.info(f"Loading {len(sources)} word lists.")
        return [WordListIO.read_column(source, comment_prefix) for source in sources]
