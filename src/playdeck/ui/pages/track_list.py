# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Common widget for pages that list tracks."""

import qtawesome as qta
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import QLabel, QListWidget, QListWidgetItem, QVBoxLayout, QWidget

from playdeck.models.track import Track
from playdeck.ui.pages.base import ViewPage
from playdeck.ui.pages.playlist_interface import PlaylistInterface

PAGE_ICON_SIZE_PX = 48


class TrackListPage(QWidget, ViewPage):
    """A page showing the filtered tracks of its playlist interface."""

    icon_name = "fa5s.music"

    def __init__(self, interface: PlaylistInterface | None = None, parent=None):
        super().__init__(parent)
        self._interface = interface or PlaylistInterface(parent=self)
        if self._interface.parent() is None:
            self._interface.setParent(self)
        self.setup_ui()
        self._interface.track_count_changed.connect(self.refresh)
        self._interface.source_track_count_changed.connect(self.refresh)

    def setup_ui(self):
        """Set up the page UI."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.header_label = QLabel()
        self.header_label.setStyleSheet("""
            QLabel {
                font-size: 18px;
                font-weight: bold;
                color: #333;
                margin: 8px;
            }
        """)

        self.track_list = QListWidget()
        self.track_list.setAlternatingRowColors(True)

        layout.addWidget(self.header_label)
        layout.addWidget(self.track_list, 1)
        self.refresh()

    def refresh(self, *_args):
        """Rebuild the list from the interface's filtered tracks."""
        self.track_list.clear()
        for track in self._interface.filtered_tracks():
            item = QListWidgetItem(self.item_text(track))
            item.setData(Qt.ItemDataRole.UserRole, track.title)
            self.track_list.addItem(item)

    def update_header(self):
        """Show the current title in the page header."""
        self.header_label.setText(self.title())

    def item_text(self, track: Track) -> str:
        if track.artist:
            return f"{track.artist} - {track.title}"
        return track.title

    def visible_count(self) -> int:
        return self.track_list.count()

    # --- ViewPage ---
    def title(self) -> str:
        return ""

    def pixmap(self) -> QPixmap | None:
        return qta.icon(self.icon_name).pixmap(PAGE_ICON_SIZE_PX, PAGE_ICON_SIZE_PX)

    def playlist_interface(self) -> PlaylistInterface:
        return self._interface

    def show_stats_bar(self) -> bool:
        return True

    def show_filter(self) -> bool:
        return True

    def jump_to_current_track(self) -> bool:
        if self.track_list.count() == 0:
            return False
        self.track_list.scrollToItem(self.track_list.item(0))
        return True

    # --- HasFilter ---
    def filter(self) -> str:
        return self._interface.filter()

    def set_filter(self, text: str) -> None:
        self._interface.set_filter(text)
