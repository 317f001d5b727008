"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar and the generator panel.

Why is this file needed?
------------------------
1. Layout: It hosts the ExcuseGeneratorPanel as the central widget.
2. Routing: It connects global actions (File -> Quit, Help -> About, Enter to
   generate) to the appropriate handlers.
"""
from typing import Optional

import numpy as np
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow

from bofhexcuses.config import product_string
from bofhexcuses.model.excuse_model import ExcuseModel
from bofhexcuses.view.dialogs.about_dialog import AboutDialog
from bofhexcuses.view.generator_panel import ExcuseGeneratorPanel


class MainWindow(QMainWindow):
    def __init__(self, model: ExcuseModel, rng: Optional[np.random.Generator] = None) -> None:
        super().__init__()
        self.model: ExcuseModel = model

        self.setWindowTitle(product_string())

        # --- MAIN CONTAINER ---
        self.generator = ExcuseGeneratorPanel(self.model, rng)
        self.setCentralWidget(self.generator)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.generator.excuse_changed.connect(self.on_excuse_changed)

    def _create_actions(self) -> None:
        # File Actions
        self.act_generate = QAction("&Generate", self)
        self.act_generate.setShortcuts([QKeySequence("Return"), QKeySequence("Enter")])
        self.act_generate.triggered.connect(self.generator.spin_all)

        self.act_exit = QAction("&Quit", self)
        self.act_exit.setShortcut(QKeySequence("Ctrl+Q"))
        self.act_exit.triggered.connect(self.close)

        # Help Actions
        self.act_about = QAction("&About", self)
        self.act_about.triggered.connect(self.on_help_about)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_generate)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        help_menu = menu_bar.addMenu("&Help")
        help_menu.addAction(self.act_about)

    # --- SLOTS ---

    def on_help_about(self) -> None:
        dlg = AboutDialog(self)
        dlg.exec()

    def on_excuse_changed(self, text: str) -> None:
        self.statusBar().showMessage(text)
