# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Pages for playlists and dynamic playlists."""

import logging

from playdeck.models.playlist import DynamicPlaylist, Playlist
from playdeck.ui.pages.playlist_interface import PlaylistInterface
from playdeck.ui.pages.track_list import TrackListPage
from playdeck.ui.view_settings import ViewSettings

logger = logging.getLogger(__name__)


class PlaylistView(TrackListPage):
    """Track list of a single playlist."""

    icon_name = "fa5s.list"

    def __init__(self, playlist: Playlist, parent=None):
        interface = PlaylistInterface(
            playlist.entries, supports_shuffle=self._supports_shuffle(playlist)
        )
        super().__init__(interface, parent)
        self._playlist = playlist
        self._auto_update = False
        self.update_header()

    @staticmethod
    def _supports_shuffle(playlist: Playlist) -> bool:
        return True

    def playlist(self) -> Playlist:
        return self._playlist

    def title(self) -> str:
        return self._playlist.title or "Untitled Playlist"

    def description(self) -> str:
        if self._playlist.creator:
            return f"A playlist by {self._playlist.creator}"
        if self._playlist.author is not None:
            return f"A playlist by {self._playlist.author.display_name}"
        return self._playlist.info

    def reload(self) -> None:
        """Pick up entries changed on the playlist model."""
        self._interface.set_tracks(self._playlist.entries)

    # --- HasAutoUpdate ---
    def can_auto_update(self) -> bool:
        """Playlists owned by a peer can follow the peer's changes."""
        author = self._playlist.author
        return author is not None and not author.is_local

    def auto_update(self) -> bool:
        return self._auto_update

    def set_auto_update(self, enabled: bool) -> None:
        if not self.can_auto_update():
            return
        self._auto_update = bool(enabled)
        logger.debug("Auto update for %s set to %s", self.title(), self._auto_update)

    # --- HasViewSettings ---
    def save_view_settings(self, store: ViewSettings) -> None:
        store.set_shuffle_state(self._playlist.guid, self._interface.shuffled())
        store.set_repeat_mode(self._playlist.guid, self._interface.repeat_mode())

    def load_view_settings(self, store: ViewSettings) -> None:
        if not store.has_playlist_settings(self._playlist.guid):
            return
        self._interface.set_shuffled(store.shuffle_state(self._playlist.guid))
        self._interface.set_repeat_mode(store.repeat_mode(self._playlist.guid))


class DynamicPlaylistView(PlaylistView):
    """Page of a generated playlist; on-demand playlists cannot be shuffled."""

    icon_name = "fa5s.magic"

    @staticmethod
    def _supports_shuffle(playlist: Playlist) -> bool:
        return not (isinstance(playlist, DynamicPlaylist) and playlist.is_on_demand)

    def show_stats_bar(self) -> bool:
        return not self._playlist.is_on_demand

    def show_filter(self) -> bool:
        return not self._playlist.is_on_demand
