"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: Word-list names and the comment marker live in one place
   instead of being repeated by the model and the views.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find bundled word lists when the app is frozen into an .exe.

Exports:
    WORDLISTS_PATH (str): Absolute path to the bundled word-list directory.
    DEFAULT_COLUMN_FILES (tuple): Word lists of the classic four-column model.
    COMMENT_PREFIX (str): Lines starting with this marker are ignored.
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/bofhexcuses/
    package_root: Path = Path(__file__).parent
    return os.path.join(str(package_root), relative_path)


# Global Constants
COMMENT_PREFIX: str = "#"

WORDLISTS_PATH: str = get_resource_path(os.path.join("resources", "wordlists"))

# One file per column, in column order
DEFAULT_COLUMN_FILES: tuple[str, ...] = ("a.txt", "b.txt", "c.txt", "d.txt")

PRODUCT_NAME: str = "BOFH Excuse Generator"
PRODUCT_VERSION: str = "1.0"
COPYRIGHT_LINE: str = "© 2013 by Joseph Fox-Rabinovitz"
BOFH_URL: str = "http://bofh.ntk.net/BOFH/index.php"

# Typing this user name at the prompt unlocks the generator
UNLOCK_USER_NAME: str = "bofh"


def product_string() -> str:
    return f"{PRODUCT_NAME} v{PRODUCT_VERSION}"
