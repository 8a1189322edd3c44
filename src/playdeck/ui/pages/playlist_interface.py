# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Playable track list state shared between a page and the rest of the app."""

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from playdeck.models.enums import RepeatMode, ViewMode
from playdeck.models.track import Track

logger = logging.getLogger(__name__)


class PlaylistInterface(QObject):
    """Tracks, filter, repeat and shuffle state behind a page."""

    repeat_mode_changed = pyqtSignal(object)  # RepeatMode
    shuffle_mode_changed = pyqtSignal(bool)
    track_count_changed = pyqtSignal(int)  # tracks left after filtering
    source_track_count_changed = pyqtSignal(int)  # all tracks
    filter_changed = pyqtSignal(str)

    def __init__(
        self,
        tracks: list[Track] | None = None,
        *,
        view_mode: ViewMode = ViewMode.FLAT,
        supports_shuffle: bool = True,
        supports_repeat: bool = True,
        parent=None,
    ):
        super().__init__(parent)
        self._tracks: list[Track] = list(tracks or [])
        self._filter = ""
        self._repeat_mode = RepeatMode.NONE
        self._shuffled = False
        self._view_mode = view_mode
        self._supports_shuffle = supports_shuffle
        self._supports_repeat = supports_repeat
        self._children: list[PlaylistInterface] = []

    # --- Tracks ---
    def tracks(self) -> list[Track]:
        return list(self._tracks)

    def set_tracks(self, tracks: list[Track]) -> None:
        """Replace the track list and announce the new counts."""
        self._tracks = list(tracks)
        self.source_track_count_changed.emit(self.unfiltered_track_count())
        self.track_count_changed.emit(self.track_count())

    def filtered_tracks(self) -> list[Track]:
        """Get the tracks matching the current filter."""
        if not self._filter:
            return list(self._tracks)
        return [track for track in self._tracks if track.match(self._filter)]

    def track_count(self) -> int:
        return len(self.filtered_tracks())

    def unfiltered_track_count(self) -> int:
        return len(self._tracks)

    # --- Filter ---
    def filter(self) -> str:
        return self._filter

    def set_filter(self, text: str) -> None:
        """Narrow the visible tracks to those matching ``text``."""
        text = text.strip()
        if text == self._filter:
            return
        self._filter = text
        self.filter_changed.emit(text)
        self.track_count_changed.emit(self.track_count())

    # --- Playback modes ---
    def supports_shuffle(self) -> bool:
        return self._supports_shuffle

    def supports_repeat(self) -> bool:
        return self._supports_repeat

    def repeat_mode(self) -> RepeatMode:
        return self._repeat_mode

    def set_repeat_mode(self, mode: RepeatMode) -> None:
        if not self._supports_repeat:
            logger.debug("Repeat mode not supported, ignoring %s", mode)
            return
        mode = RepeatMode(mode)
        if mode == self._repeat_mode:
            return
        self._repeat_mode = mode
        self.repeat_mode_changed.emit(mode)

    def shuffled(self) -> bool:
        return self._shuffled

    def set_shuffled(self, enabled: bool) -> None:
        if not self._supports_shuffle:
            logger.debug("Shuffle not supported, ignoring")
            return
        enabled = bool(enabled)
        if enabled == self._shuffled:
            return
        self._shuffled = enabled
        self.shuffle_mode_changed.emit(enabled)

    def view_mode(self) -> ViewMode:
        return self._view_mode

    # --- Child interfaces ---
    def add_child_interface(self, child: "PlaylistInterface") -> None:
        """Register an interface nested inside this one (e.g. an album on an artist page)."""
        if child is not self and child not in self._children:
            self._children.append(child)

    def has_child_interface(self, other: "PlaylistInterface") -> bool:
        """Check whether ``other`` is nested anywhere below this interface."""
        for child in self._children:
            if child is other or child.has_child_interface(other):
                return True
        return False
