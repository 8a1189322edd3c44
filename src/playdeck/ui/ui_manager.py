# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""UI manager wiring the navigation bar and status bar to the view manager."""

import logging

from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QLabel, QMainWindow, QStackedWidget

from playdeck.config.user import UserConfig
from playdeck.models.source import SourceList
from playdeck.ui.config_manager import ConfigManager
from playdeck.ui.navbar import NavigationBar
from playdeck.ui.view_manager import ViewManager
from playdeck.ui.view_settings import ViewSettings

logger = logging.getLogger(__name__)


class UIManager:
    """Manages UI components and their interactions."""

    def __init__(
        self,
        main_window: QMainWindow,
        config: UserConfig,
        config_manager: ConfigManager,
        source_list: SourceList,
        settings: QSettings | None = None,
    ):
        self.main_window = main_window
        self.config = config
        self.config_manager = config_manager
        self.source_list = source_list
        self.settings = settings or QSettings("playdeck", "playdeck")

        # UI components
        self.navbar: NavigationBar | None = None
        self.view_manager: ViewManager | None = None
        self.status_label: QLabel | None = None
        self._num_tracks = 0
        self._num_shown = 0

    def setup_ui(self):
        """Set up all UI components."""
        self._setup_navbar()
        self._setup_view_manager()
        self._setup_status_bar()
        self._connect_signals()

    def _setup_navbar(self):
        """Set up the navigation bar."""
        self.navbar = NavigationBar()
        self.main_window.addToolBar(self.navbar)

    def _setup_view_manager(self):
        """Set up the view manager and place its page stack in the window."""
        view_settings = ViewSettings(
            self.settings,
            recent_limit=self.config.navigation.recent_playlists_limit,
        )
        # The stack must be created first so it is torn down before the manager
        stack = QStackedWidget()
        self.main_window.setCentralWidget(stack)
        self.view_manager = ViewManager(
            config=self.config.navigation,
            source_list=self.source_list,
            settings=view_settings,
            stack=stack,
            parent=self.main_window,
        )

    def _setup_status_bar(self):
        """Set up the status bar."""
        self.status_bar = self.main_window.statusBar()
        self.status_label = QLabel("Ready")
        self.status_bar.addWidget(self.status_label)

        config_status = QLabel(f"Config: {self.config_manager.config_path}")
        self.status_bar.addPermanentWidget(config_status)

    def _connect_signals(self):
        """Connect navigation bar and view manager to each other."""
        navbar = self.navbar
        manager = self.view_manager
        if not navbar or not manager:
            return

        navbar.back_requested.connect(manager.history_back)
        navbar.mode_requested.connect(self._handle_mode_request)
        navbar.shuffle_toggled.connect(manager.set_shuffled)
        navbar.repeat_requested.connect(manager.set_repeat_mode)
        navbar.filter_changed.connect(manager.set_filter)

        manager.history_changed.connect(navbar.set_can_go_back)
        manager.modes_available.connect(navbar.set_modes_available)
        manager.mode_changed.connect(navbar.set_mode)
        manager.shuffle_available.connect(navbar.set_shuffle_available)
        manager.shuffle_mode_changed.connect(navbar.set_shuffled)
        manager.repeat_available.connect(navbar.set_repeat_available)
        manager.repeat_mode_changed.connect(navbar.set_repeat_mode)
        manager.filter_available.connect(navbar.set_filter_available)
        manager.filter_text_changed.connect(navbar.set_filter_text)
        manager.stats_available.connect(navbar.set_stats_available)
        manager.num_tracks_changed.connect(self._handle_num_tracks)
        manager.num_shown_changed.connect(self._handle_num_shown)
        manager.info_changed.connect(self._handle_info_changed)

    def _handle_mode_request(self, mode):
        """Route a display mode button to the matching view manager setter."""
        setters = {
            "TREE": self.view_manager.set_tree_mode,
            "FLAT": self.view_manager.set_table_mode,
            "ALBUM": self.view_manager.set_album_mode,
        }
        setter = setters.get(mode.name)
        if setter:
            setter()

    def _handle_num_tracks(self, count: int):
        self._num_tracks = count
        self.navbar.set_track_counts(self._num_shown, self._num_tracks)

    def _handle_num_shown(self, count: int):
        self._num_shown = count
        self.navbar.set_track_counts(self._num_shown, self._num_tracks)

    def _handle_info_changed(self, title: str, description: str):
        """Show the page caption in the window title and status bar."""
        self.main_window.setWindowTitle(f"{title} - Playdeck" if title else "Playdeck")
        self.update_status(description or title)

    def update_status(self, message: str):
        """Update the status bar message."""
        if self.status_label:
            self.status_label.setText(message)

    def restore_geometry(self):
        """Restore window geometry from settings."""
        geometry = self.settings.value("geometry")
        if geometry:
            self.main_window.restoreGeometry(geometry)

        window_state = self.settings.value("windowState")
        if window_state:
            self.main_window.restoreState(window_state)

    def save_geometry(self):
        """Save window geometry to settings."""
        self.settings.setValue("geometry", self.main_window.saveGeometry())
        self.settings.setValue("windowState", self.main_window.saveState())

    def get_view_manager(self) -> ViewManager | None:
        """Get the view manager."""
        return self.view_manager

    def get_navbar(self) -> NavigationBar | None:
        """Get the navigation bar."""
        return self.navbar
