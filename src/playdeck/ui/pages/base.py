# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""View page abstraction and the optional capabilities a page can offer.

Every page the view manager shows is a widget carrying the ``ViewPage``
mixin. Optional behaviour (filtering, mode switching, auto updates, stored
view settings) is checked with ``isinstance`` against the runtime-checkable
protocols below, never against concrete page classes.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import QWidget

from playdeck.models.enums import ViewMode
from playdeck.models.playlist import Playlist

if TYPE_CHECKING:
    from playdeck.ui.pages.playlist_interface import PlaylistInterface
    from playdeck.ui.view_settings import ViewSettings


class ViewPage:
    """Mixin for anything that can be shown as the single active view."""

    def widget(self) -> QWidget:
        """Get the widget placed in the view stack."""
        if isinstance(self, QWidget):
            return self
        raise NotImplementedError

    def title(self) -> str:
        """Get the caption shown in the info bar."""
        raise NotImplementedError

    def description(self) -> str:
        return ""

    def pixmap(self) -> QPixmap | None:
        return None

    def playlist_interface(self) -> "PlaylistInterface | None":
        """Get the playable interface behind this page, if any."""
        return None

    def show_stats_bar(self) -> bool:
        return False

    def show_modes(self) -> bool:
        return False

    def show_filter(self) -> bool:
        return False

    def show_info_bar(self) -> bool:
        return True

    def queue_visible(self) -> bool:
        return False

    def is_temporary_page(self) -> bool:
        return False

    def is_being_played(self) -> bool:
        return False

    def jump_to_current_track(self) -> bool:
        """Scroll to the playing track; return False if the page cannot."""
        return False


@runtime_checkable
class HasFilter(Protocol):
    """A page whose contents can be narrowed by filter text."""

    def filter(self) -> str: ...

    def set_filter(self, text: str) -> None: ...


@runtime_checkable
class HasModeSwitch(Protocol):
    """A page that can re-render itself in another display mode."""

    def view_mode(self) -> ViewMode: ...

    def supports_view_mode(self, mode: ViewMode) -> bool: ...

    def set_view_mode(self, mode: ViewMode) -> None: ...


@runtime_checkable
class HasAutoUpdate(Protocol):
    """A page that can follow upstream changes automatically."""

    def can_auto_update(self) -> bool: ...

    def auto_update(self) -> bool: ...

    def set_auto_update(self, enabled: bool) -> None: ...


@runtime_checkable
class HasViewSettings(Protocol):
    """A page that stores view specific state across page switches."""

    def save_view_settings(self, store: "ViewSettings") -> None: ...

    def load_view_settings(self, store: "ViewSettings") -> None: ...


@runtime_checkable
class HasPlaylist(Protocol):
    """A page rendering a playlist or dynamic playlist."""

    def playlist(self) -> Playlist: ...
