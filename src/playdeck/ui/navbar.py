# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Navigation bar with back button, display modes, playback modes and filter."""

import qtawesome as qta
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QActionGroup
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QLineEdit, QToolBar, QWidget

from playdeck.models.enums import RepeatMode, ViewMode

REPEAT_CYCLE = {
    RepeatMode.NONE: RepeatMode.ALL,
    RepeatMode.ALL: RepeatMode.ONE,
    RepeatMode.ONE: RepeatMode.NONE,
}


class FilterInputWidget(QWidget):
    """Filter text field."""

    filter_changed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setup_ui()

    def setup_ui(self):
        """Set up the filter input UI."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.filter_input = QLineEdit()
        self.filter_input.setPlaceholderText("Filter...")
        self.filter_input.setClearButtonEnabled(True)
        self.filter_input.setFixedWidth(220)
        self.filter_input.textChanged.connect(self.filter_changed.emit)

        layout.addWidget(QLabel("Filter:"))
        layout.addWidget(self.filter_input)

    def set_text(self, text: str):
        """Show ``text`` without announcing it as a new filter."""
        if self.filter_input.text() == text:
            return
        self.filter_input.blockSignals(True)
        self.filter_input.setText(text)
        self.filter_input.blockSignals(False)


class NavigationBar(QToolBar):
    """Main toolbar reflecting the capabilities of the visible page."""

    back_requested = pyqtSignal()
    mode_requested = pyqtSignal(object)  # ViewMode
    shuffle_toggled = pyqtSignal(bool)
    repeat_requested = pyqtSignal(object)  # RepeatMode
    filter_changed = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__("Navigation", parent)
        self.setObjectName("NavigationBar")  # Set object name for Qt state saving
        self._repeat_mode = RepeatMode.NONE
        self.setup_ui()

    def setup_ui(self):
        """Set up the navigation bar UI."""
        self.setMovable(False)
        self.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)

        self.back_action = self.addAction("Back")
        self.back_action.setIcon(qta.icon("fa5s.arrow-left"))
        self.back_action.setEnabled(False)
        self.back_action.triggered.connect(self.back_requested)

        self.addSeparator()

        # Display mode toggle buttons
        self.mode_group = QActionGroup(self)
        self.mode_group.setExclusive(True)
        self.mode_actions = {}
        for mode, label, icon in (
            (ViewMode.TREE, "Artists", "fa5s.sitemap"),
            (ViewMode.FLAT, "Tracks", "fa5s.table"),
            (ViewMode.ALBUM, "Albums", "fa5s.th-large"),
        ):
            action = self.addAction(label)
            action.setIcon(qta.icon(icon))
            action.setCheckable(True)
            action.triggered.connect(lambda _checked, m=mode: self.mode_requested.emit(m))
            self.mode_group.addAction(action)
            self.mode_actions[mode] = action

        self.addSeparator()

        # Playback mode controls
        self.shuffle_action = self.addAction("Shuffle")
        self.shuffle_action.setIcon(qta.icon("fa5s.random"))
        self.shuffle_action.setCheckable(True)
        self.shuffle_action.toggled.connect(self.shuffle_toggled.emit)

        self.repeat_action = self.addAction("Repeat")
        self.repeat_action.setIcon(qta.icon("fa5s.redo"))
        self.repeat_action.triggered.connect(self.cycle_repeat_mode)

        self.addSeparator()

        self.stats_label = QLabel("")
        self.stats_label.setStyleSheet("color: #666; font-size: 11px; margin: 0 8px;")
        self.addWidget(self.stats_label)

        self.filter_widget = FilterInputWidget()
        self.filter_widget.filter_changed.connect(self.filter_changed.emit)
        self.addWidget(self.filter_widget)

    def cycle_repeat_mode(self):
        """Request the next repeat mode."""
        self.repeat_requested.emit(REPEAT_CYCLE[self._repeat_mode])

    # --- Slots fed by the view manager ---
    def set_can_go_back(self, enabled: bool):
        self.back_action.setEnabled(enabled)

    def set_modes_available(self, available: bool):
        for action in self.mode_actions.values():
            action.setVisible(available)

    def set_mode(self, mode):
        action = self.mode_actions.get(mode)
        if action is not None:
            action.setChecked(True)

    def set_shuffle_available(self, available: bool):
        self.shuffle_action.setEnabled(available)

    def set_shuffled(self, enabled: bool):
        self.shuffle_action.blockSignals(True)
        self.shuffle_action.setChecked(enabled)
        self.shuffle_action.blockSignals(False)

    def set_repeat_available(self, available: bool):
        self.repeat_action.setEnabled(available)

    def set_repeat_mode(self, mode):
        self._repeat_mode = RepeatMode(mode)
        labels = {
            RepeatMode.NONE: "Repeat",
            RepeatMode.ALL: "Repeat All",
            RepeatMode.ONE: "Repeat One",
        }
        self.repeat_action.setText(labels[self._repeat_mode])

    def set_filter_available(self, available: bool):
        self.filter_widget.setEnabled(available)

    def set_filter_text(self, text: str):
        self.filter_widget.set_text(text)

    def set_stats_available(self, available: bool):
        self.stats_label.setVisible(available)

    def set_track_counts(self, shown: int, total: int):
        if shown == total:
            self.stats_label.setText(f"{total} tracks")
        else:
            self.stats_label.setText(f"Showing {shown} of {total} tracks")
