"""
User Name Prompt
================
The "experience enhancement" gate shown before the main window.

Only the user name ``bofh`` gets through. Cancelling is not an option, and
everybody else is told their account has just been deleted.

The dialog calls are injectable so the flow can be driven without a display.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtWidgets import QApplication, QInputDialog, QMessageBox, QWidget

from bofhexcuses.config import UNLOCK_USER_NAME

logger = logging.getLogger(__name__)

# (text, accepted) like QInputDialog.getText
GetText = Callable[[], "tuple[str, bool]"]
# (title, text, icon)
ShowMessage = Callable[[str, str, QMessageBox.Icon], None]

PROMPT_TITLE = "Experience Enhancement Query"
PROMPT_LABEL = "Please enter your user name"
CANCEL_TITLE = "Informational Communication"
CANCEL_TEXT = "You can run, but you can't hide"
FAREWELL_TITLE = "Do Not Call Again."


def deletion_message(user_name: str) -> str:
    """The farewell shown to anyone who is not the BOFH."""
    user_string = "All users have" if not user_name else f"User {user_name.strip()} has"
    return f"{user_string} been deleted from your system. Good bye!"


def ask_for_user_name(parent: Optional[QWidget] = None,
                      get_text: Optional[GetText] = None,
                      show_message: Optional[ShowMessage] = None,
                      beep: Optional[Callable[[], None]] = None) -> bool:
    """
    Asks for a user name until one is given.

    Returns:
        True if the generator should be shown, False if the application
        should quit.
    """
    if get_text is None:
        def get_text() -> tuple[str, bool]:
            return QInputDialog.getText(parent, PROMPT_TITLE, PROMPT_LABEL)

    if show_message is None:
        def show_message(title: str, text: str, icon: QMessageBox.Icon) -> None:
            box = QMessageBox(icon, title, text, QMessageBox.Ok, parent)
            box.exec()

    if beep is None:
        beep = QApplication.beep

    while True:
        name, accepted = get_text()
        if accepted:
            break
        logger.debug("User name prompt cancelled, asking again.")
        show_message(CANCEL_TITLE, CANCEL_TEXT, QMessageBox.Warning)

    if name == UNLOCK_USER_NAME:
        logger.info("Operator recognised, starting generator.")
        return True

    logger.info("Unknown user, declining to start.")
    beep()
    show_message(FAREWELL_TITLE, deletion_message(name), QMessageBox.Information)
    return False
