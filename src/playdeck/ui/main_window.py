# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Main application window for playdeck."""

import logging

from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QMessageBox

from playdeck.models.source import Source, SourceList
from playdeck.ui.config_manager import ConfigManager
from playdeck.ui.ui_manager import UIManager

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, config_manager: ConfigManager | None = None):
        super().__init__()

        # Initialize managers
        self.config_manager = config_manager or ConfigManager()
        self.config = self.config_manager.load_config()

        self.source_list = SourceList(self)
        self.local_source = Source(id="local", is_local=True)
        self.source_list.add(self.local_source)

        # Setup UI
        self.setWindowTitle("Playdeck")
        self.setGeometry(100, 100, 1200, 800)

        self.ui_manager = UIManager(
            self, self.config, self.config_manager, self.source_list
        )
        self.ui_manager.setup_ui()
        self.view_manager = self.ui_manager.get_view_manager()

        self.setup_menus()
        self.ui_manager.restore_geometry()
        self.view_manager.show_landing_page()

    def setup_menus(self):
        """Set up the menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        new_playlist_action = QAction("&New Playlist", self)
        new_playlist_action.setShortcut(QKeySequence.StandardKey.New)
        new_playlist_action.triggered.connect(self.create_local_playlist)
        file_menu.addAction(new_playlist_action)

        new_station_action = QAction("New &Station...", self)
        new_station_action.triggered.connect(self.view_manager.show_new_playlist_page)
        file_menu.addAction(new_station_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.setStatusTip("Exit the application")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Go menu
        go_menu = menubar.addMenu("&Go")

        back_action = QAction("&Back", self)
        back_action.setShortcut(QKeySequence.StandardKey.Back)
        back_action.triggered.connect(self.view_manager.history_back)
        go_menu.addAction(back_action)

        go_menu.addSeparator()

        for label, slot in (
            ("&Welcome", self.view_manager.show_welcome_page),
            ("What's &Hot", self.view_manager.show_whats_hot_page),
            ("&My Collection", self.show_local_collection),
            ("&Super Collection", self.view_manager.show_super_collection),
        ):
            action = QAction(label, self)
            action.triggered.connect(slot)
            go_menu.addAction(action)

        # Help menu
        help_menu = menubar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.setStatusTip("About Playdeck")
        about_action.triggered.connect(self.show_about)
        help_menu.addAction(about_action)

    def create_local_playlist(self):
        """Create an empty playlist owned by the local user and open it."""
        self.view_manager.create_playlist(
            self.local_source, {"title": "New Playlist", "creator": "Me"}
        )

    def show_local_collection(self):
        """Show the local collection in the current display mode."""
        self.view_manager.show_collection(self.local_source.collection)

    def show_about(self):
        """Show about dialog."""
        QMessageBox.about(
            self,
            "About Playdeck",
            "Playdeck - Music Player\n\n"
            "Copyright (c) 2025 playdeck and contributors.\n"
            "Licensed under the MIT license.",
        )

    def closeEvent(self, a0: QCloseEvent):  # noqa: N802
        """Handle window close event."""
        if self.view_manager.settings is not None:
            self.view_manager.settings.sync()
        self.ui_manager.save_geometry()
        a0.accept()
