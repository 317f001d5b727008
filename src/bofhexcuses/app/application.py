from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

from bofhexcuses.config import PRODUCT_NAME

ORG_ID = "madphysicist"
APP_ID = "bofh-excuses"
ORG_DOMAIN = "http://bofh.ntk.net/"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance, or reuse the running one."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv if argv is None else argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", PRODUCT_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
