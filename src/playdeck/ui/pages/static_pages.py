# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Pages that do not render a domain object."""

import qtawesome as qta
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from playdeck.ui.pages.base import ViewPage
from playdeck.ui.pages.track_list import PAGE_ICON_SIZE_PX


class StaticPage(QWidget, ViewPage):
    """A page with a title and a short message."""

    page_title = ""
    page_description = ""
    icon_name = "fa5s.home"

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setup_ui()

    def setup_ui(self):
        """Set up the page UI."""
        layout = QVBoxLayout(self)

        title_label = QLabel(self.page_title)
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title_label.setStyleSheet("""
            QLabel {
                font-size: 24px;
                font-weight: bold;
                color: #333;
                margin: 20px;
            }
        """)

        content_label = QLabel(self.page_description)
        content_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        content_label.setStyleSheet("""
            QLabel {
                font-size: 14px;
                color: #666;
                margin: 10px;
            }
        """)

        layout.addStretch()
        layout.addWidget(title_label)
        layout.addWidget(content_label)
        layout.addStretch()

    def title(self) -> str:
        return self.page_title

    def description(self) -> str:
        return self.page_description

    def pixmap(self) -> QPixmap | None:
        return qta.icon(self.icon_name).pixmap(PAGE_ICON_SIZE_PX, PAGE_ICON_SIZE_PX)


class WelcomePage(StaticPage):
    """Start page."""

    page_title = "Welcome to Playdeck"
    page_description = "Recently played playlists and new additions"

    def show_info_bar(self) -> bool:
        return False

    def queue_visible(self) -> bool:
        return True


class WhatsHotPage(StaticPage):
    """Charts and trending music."""

    page_title = "What's Hot"
    page_description = "Current music charts, across the web"
    icon_name = "fa5s.fire"


class NewPlaylistPage(StaticPage):
    """Prompt for creating a new station or playlist."""

    page_title = "New Station"
    page_description = "Create a new station based on artists or tags"
    icon_name = "fa5s.plus"
