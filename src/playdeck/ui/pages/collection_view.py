# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Collection pages in flat, tree and album grid flavours."""

from playdeck.models.enums import ViewMode
from playdeck.models.source import Collection
from playdeck.models.track import Track
from playdeck.ui.pages.playlist_interface import PlaylistInterface
from playdeck.ui.pages.track_list import TrackListPage


class CollectionPage(TrackListPage):
    """Tracks of one or more collections rendered in a fixed display mode."""

    MODE = ViewMode.UNKNOWN

    def __init__(
        self,
        collections: list[Collection],
        *,
        title: str | None = None,
        description: str | None = None,
        parent=None,
    ):
        interface = PlaylistInterface(view_mode=self.MODE)
        super().__init__(interface, parent)
        self._collections: list[Collection] = []
        self._title = title
        self._description = description
        for collection in collections:
            self.add_collection(collection)
        self.update_header()

    def collections(self) -> list[Collection]:
        return list(self._collections)

    def add_collection(self, collection: Collection) -> bool:
        """Include another collection; returns False if it was already shown."""
        if collection in self._collections:
            return False
        self._collections.append(collection)
        tracks = [track for c in self._collections for track in c.tracks]
        self._interface.set_tracks(tracks)
        return True

    def title(self) -> str:
        if self._title is not None:
            return self._title
        if len(self._collections) == 1:
            return self._collections[0].name or "Collection"
        return "Collection"

    def description(self) -> str:
        if self._description is not None:
            return self._description
        count = len(self._collections)
        return f"{count} collection" if count == 1 else f"{count} collections"

    def show_modes(self) -> bool:
        return True

    def view_mode(self) -> ViewMode:
        return self.MODE


class CollectionFlatView(CollectionPage):
    """Collection as a flat track table."""

    MODE = ViewMode.FLAT
    icon_name = "fa5s.table"

    def item_text(self, track: Track) -> str:
        parts = [track.artist, track.album, track.title, track.duration_formatted]
        return " | ".join(part for part in parts if part)


class CollectionTreeView(CollectionPage):
    """Collection as an artist / album / track tree."""

    MODE = ViewMode.TREE
    icon_name = "fa5s.sitemap"

    def item_text(self, track: Track) -> str:
        return " / ".join(part for part in (track.artist, track.album, track.title) if part)


class CollectionAlbumView(CollectionPage):
    """Collection as a grid of albums."""

    MODE = ViewMode.ALBUM
    icon_name = "fa5s.th-large"

    def refresh(self, *_args):
        """List each album once, in first-seen order."""
        self.track_list.clear()
        seen: set[tuple[str, str]] = set()
        for track in self._interface.filtered_tracks():
            key = (track.album.lower(), track.artist.lower())
            if not track.album or key in seen:
                continue
            seen.add(key)
            self.track_list.addItem(f"{track.album} - {track.artist}")
