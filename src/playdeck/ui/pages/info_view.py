# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Info pages for artists, albums and sources."""

from playdeck.models.artist import Album, Artist
from playdeck.models.enums import ModelMode, ViewMode
from playdeck.models.source import Source
from playdeck.models.track import Track
from playdeck.ui.pages.playlist_interface import PlaylistInterface
from playdeck.ui.pages.track_list import TrackListPage


class ArtistInfoView(TrackListPage):
    """Top tracks of an artist, as a tree grouped by album or a flat list."""

    icon_name = "fa5s.user"
    SUPPORTED_MODES = (ViewMode.TREE, ViewMode.FLAT)

    def __init__(self, artist: Artist, tracks: list[Track] | None = None, parent=None):
        super().__init__(PlaylistInterface(view_mode=ViewMode.TREE), parent)
        self._artist = artist
        self._mode = ViewMode.TREE
        self._interface.set_tracks(tracks or [])
        self.update_header()

    def artist(self) -> Artist:
        return self._artist

    def title(self) -> str:
        return self._artist.display_name

    def description(self) -> str:
        return "Artist details and top tracks"

    def is_temporary_page(self) -> bool:
        return True

    def show_stats_bar(self) -> bool:
        return False

    def item_text(self, track: Track) -> str:
        if self._mode == ViewMode.TREE and track.album:
            return f"{track.album} / {track.title}"
        return track.title

    # --- HasModeSwitch ---
    def view_mode(self) -> ViewMode:
        return self._mode

    def supports_view_mode(self, mode: ViewMode) -> bool:
        return mode in self.SUPPORTED_MODES

    def set_view_mode(self, mode: ViewMode) -> None:
        if not self.supports_view_mode(mode) or mode == self._mode:
            return
        self._mode = mode
        self.refresh()


class AlbumInfoView(TrackListPage):
    """Track listing of an album."""

    icon_name = "fa5s.compact-disc"

    def __init__(
        self,
        album: Album,
        tracks: list[Track] | None = None,
        mode: ModelMode = ModelMode.INFO_SYSTEM,
        parent=None,
    ):
        super().__init__(PlaylistInterface(tracks), parent)
        self._album = album
        self._model_mode = ModelMode(mode)
        self.update_header()

    def album(self) -> Album:
        return self._album

    def model_mode(self) -> ModelMode:
        return self._model_mode

    def title(self) -> str:
        return self._album.name

    def description(self) -> str:
        if self._album.artist is not None:
            return f"By {self._album.artist.display_name}"
        return ""

    def is_temporary_page(self) -> bool:
        return True

    def item_text(self, track: Track) -> str:
        return track.title


class SourceInfoView(TrackListPage):
    """Overview of what a source shares."""

    icon_name = "fa5s.user-friends"

    def __init__(self, source: Source, parent=None):
        interface = PlaylistInterface(source.collection.tracks)
        super().__init__(interface, parent)
        self._source = source
        self.update_header()

    def source(self) -> Source:
        return self._source

    def title(self) -> str:
        return self._source.display_name

    def description(self) -> str:
        collection = self._source.collection
        return (
            f"{collection.track_count} tracks by "
            f"{collection.artist_count} artists"
        )

    def show_filter(self) -> bool:
        return False
