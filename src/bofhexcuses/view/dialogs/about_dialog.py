"""
Modal "About" Dialog
"""
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QVBoxLayout, QLabel, QDialogButtonBox

from bofhexcuses.config import BOFH_URL, COPYRIGHT_LINE, product_string


class AboutDialog(QDialog):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("About This Masterpiece")

        layout = QVBoxLayout(self)

        for text in (product_string(), COPYRIGHT_LINE, "\"Inspired\" by Simon Travaglia's BOFH column:"):
            layout.addWidget(self._centered(QLabel(text)))

        self.lbl_link = self._centered(QLabel(f'<a href="{BOFH_URL}">{BOFH_URL}</a>'))
        self.lbl_link.setTextFormat(Qt.RichText)
        self.lbl_link.setOpenExternalLinks(True)
        layout.addWidget(self.lbl_link)

        # Standard Buttons
        buttons = QDialogButtonBox(QDialogButtonBox.Ok)
        buttons.accepted.connect(self.accept)
        layout.addWidget(buttons)

    @staticmethod
    def _centered(label: QLabel) -> QLabel:
        label.setAlignment(Qt.AlignCenter)
        return label
