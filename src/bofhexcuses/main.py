"""
Application Initialization
==========================
This module constructs the Model/View pair and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Runs the user-name gate.
3. Loads the Data Model (ExcuseModel) from the bundled word lists.
4. Instantiates the Main Window (View), passing the model in.
"""
import logging
import sys

from PySide6.QtWidgets import QMessageBox

from bofhexcuses.app.application import create_app
from bofhexcuses.logging_config import setup_logging
from bofhexcuses.model.errors import ResourceNotFoundError
from bofhexcuses.model.excuse_model import ExcuseModel
from bofhexcuses.view.dialogs.user_prompt import ask_for_user_name
from bofhexcuses.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    # 1. Setup Logging (Console + Optional File)
    # Use logging.DEBUG to see everything during development
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Gatekeeping
    if not ask_for_user_name():
        return 0

    # 4. Initialize the Data Model
    try:
        model = ExcuseModel.default()
    except ResourceNotFoundError as e:
        logger.exception("Could not load the word lists.")
        QMessageBox.critical(None, "Missing Word Lists", str(e))
        return 1

    # 5. Initialize the Main Window, passing the model
    window = MainWindow(model)
    window.show()

    # 6. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
