# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Persistent per-view state stored through QSettings."""

import logging

from PyQt6.QtCore import QSettings

from playdeck.models.enums import RepeatMode, ViewMode

logger = logging.getLogger(__name__)


class ViewSettings:
    """Store for playlist playback modes, recent playlists and the view mode."""

    PLAYLISTS_GROUP = "playlists"
    RECENT_KEY = "ui/recent_playlists"
    VIEW_MODE_KEY = "ui/view_mode"

    def __init__(self, settings: QSettings | None = None, recent_limit: int = 15):
        self.settings = settings or QSettings("playdeck", "playdeck")
        self.recent_limit = recent_limit

    # --- Playlist playback state ---
    def shuffle_state(self, guid: str) -> bool:
        """Get the stored shuffle state of a playlist (False if never stored)."""
        return bool(
            self.settings.value(self._playlist_key(guid, "shuffled"), False, type=bool)
        )

    def set_shuffle_state(self, guid: str, enabled: bool) -> None:
        self.settings.setValue(self._playlist_key(guid, "shuffled"), bool(enabled))

    def repeat_mode(self, guid: str) -> RepeatMode:
        """Get the stored repeat mode of a playlist (NONE if never stored)."""
        raw = self.settings.value(
            self._playlist_key(guid, "repeat_mode"), int(RepeatMode.NONE), type=int
        )
        try:
            return RepeatMode(raw)
        except ValueError:
            logger.warning("Ignoring invalid stored repeat mode %r for %s", raw, guid)
            return RepeatMode.NONE

    def set_repeat_mode(self, guid: str, mode: RepeatMode) -> None:
        self.settings.setValue(self._playlist_key(guid, "repeat_mode"), int(mode))

    def has_playlist_settings(self, guid: str) -> bool:
        return self.settings.contains(self._playlist_key(guid, "shuffled"))

    def remove_playlist_settings(self, guid: str) -> None:
        self.settings.remove(f"{self.PLAYLISTS_GROUP}/{guid}")

    # --- Recently played ---
    def recent_playlists(self) -> list[str]:
        """Get recently played playlist GUIDs, most recent first."""
        value = self.settings.value(self.RECENT_KEY, [])
        # INI files store a single-item list as a plain string
        if isinstance(value, str):
            value = [value] if value else []
        return [str(guid) for guid in value or []]

    def append_recent_playlist(self, guid: str) -> None:
        """Move ``guid`` to the front of the recently played list."""
        recent = [existing for existing in self.recent_playlists() if existing != guid]
        recent.insert(0, guid)
        self.settings.setValue(self.RECENT_KEY, recent[: self.recent_limit])

    # --- View mode ---
    def view_mode(self, default: ViewMode) -> ViewMode:
        """Get the last used collection view mode."""
        raw = self.settings.value(self.VIEW_MODE_KEY, int(default), type=int)
        try:
            mode = ViewMode(raw)
        except ValueError:
            return default
        return default if mode == ViewMode.UNKNOWN else mode

    def set_view_mode(self, mode: ViewMode) -> None:
        self.settings.setValue(self.VIEW_MODE_KEY, int(mode))

    def sync(self) -> None:
        self.settings.sync()

    def _playlist_key(self, guid: str, name: str) -> str:
        return f"{self.PLAYLISTS_GROUP}/{guid}/{name}"
