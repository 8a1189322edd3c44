# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the UI manager wiring navbar and view manager together."""

from unittest.mock import patch

import pytest
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QMainWindow

from playdeck.config.user import UserConfig
from playdeck.models.enums import ViewMode
from playdeck.ui.config_manager import ConfigManager
from playdeck.ui.ui_manager import UIManager


@pytest.fixture
def ui_manager(qapp, tmp_path, source_list, temp_qsettings):
    """A UIManager set up on a bare main window."""
    window = QMainWindow()
    config = UserConfig()
    config.navigation.filter_debounce_ms = 10
    manager = UIManager(
        window,
        config,
        ConfigManager(tmp_path / "config.json"),
        source_list,
        settings=temp_qsettings,
    )
    with patch("playdeck.ui.navbar.qta") as mock_qta:
        mock_qta.icon.return_value = QIcon()
        manager.setup_ui()
    return manager


class TestUIManager:
    """Test the UIManager class."""

    def test_setup(self, ui_manager):
        """Test the view stack is the central widget."""
        view_manager = ui_manager.get_view_manager()
        assert ui_manager.main_window.centralWidget() is view_manager.widget()
        assert ui_manager.get_navbar() is not None

    def test_back_button_follows_history(self, ui_manager):
        """Test the back button is enabled once there is history."""
        view_manager = ui_manager.get_view_manager()
        navbar = ui_manager.get_navbar()

        view_manager.show_welcome_page()
        view_manager.show_whats_hot_page()
        assert navbar.back_action.isEnabled()

        navbar.back_action.trigger()
        assert not navbar.back_action.isEnabled()
        assert view_manager.current_page().title() == "Welcome to Playdeck"

    def test_mode_buttons_drive_view_manager(self, ui_manager, local_source):
        """Test the navbar mode buttons switch the collection mode."""
        view_manager = ui_manager.get_view_manager()
        navbar = ui_manager.get_navbar()
        view_manager.show_collection(local_source.collection)

        navbar.mode_actions[ViewMode.ALBUM].trigger()

        assert view_manager.current_mode() == ViewMode.ALBUM

    def test_info_updates_window(self, ui_manager, sample_playlist):
        """Test the page caption reaches the window title and status bar."""
        ui_manager.get_view_manager().show_playlist(sample_playlist)
        assert ui_manager.main_window.windowTitle() == "Road Trip - Playdeck"
        assert ui_manager.status_label.text() == "A playlist by Me"

    def test_stats_label(self, ui_manager, sample_playlist):
        """Test track counts reach the stats label."""
        ui_manager.get_view_manager().show_playlist(sample_playlist)
        assert ui_manager.get_navbar().stats_label.text() == "2 tracks"

    def test_filter_typed_in_navbar(self, ui_manager, sample_playlist, qtbot):
        """Test typing in the navbar filters the visible page."""
        page = ui_manager.get_view_manager().show_playlist(sample_playlist)
        ui_manager.get_navbar().filter_widget.filter_input.setText("two")
        qtbot.waitUntil(lambda: page.filter() == "two", timeout=1000)
        assert ui_manager.get_navbar().stats_label.text() == "Showing 1 of 2 tracks"

    def test_geometry_round_trip(self, ui_manager, temp_qsettings):
        """Test window geometry is stored."""
        ui_manager.save_geometry()
        assert temp_qsettings.value("geometry") is not None
        ui_manager.restore_geometry()
