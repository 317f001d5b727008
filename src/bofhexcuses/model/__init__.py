"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with word lists, selection and excuse text.
"""
from bofhexcuses.model.errors import BofhError, IndexOutOfRangeError, ResourceNotFoundError
from bofhexcuses.model.excuse import Excuse
from bofhexcuses.model.excuse_model import ExcuseModel
from bofhexcuses.model.io import WordListIO

__all__ = [
    "BofhError",
    "Excuse",
    "ExcuseModel",
    "IndexOutOfRangeError",
    "ResourceNotFoundError",
    "WordListIO",
]
