# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Factory building the concrete page for a domain object."""

import logging
from typing import ClassVar

from playdeck.models.artist import Album, Artist
from playdeck.models.enums import ModelMode, ViewMode
from playdeck.models.playlist import DynamicPlaylist, Playlist
from playdeck.models.source import Collection, Source, SourceList
from playdeck.models.track import Track
from playdeck.ui.pages.base import ViewPage
from playdeck.ui.pages.collection_view import (
    CollectionAlbumView,
    CollectionFlatView,
    CollectionPage,
    CollectionTreeView,
)
from playdeck.ui.pages.info_view import AlbumInfoView, ArtistInfoView, SourceInfoView
from playdeck.ui.pages.playlist_view import DynamicPlaylistView, PlaylistView
from playdeck.ui.pages.static_pages import NewPlaylistPage, WelcomePage, WhatsHotPage

logger = logging.getLogger(__name__)

SUPER_COLLECTION_TITLE = "Super Collection"
SUPER_COLLECTION_DESCRIPTION = "Combined libraries of all your online friends"


class ViewFactory:
    """Creates pages; a method returning None means the object cannot be shown."""

    _collection_views: ClassVar[dict[ViewMode, type[CollectionPage]]] = {
        ViewMode.FLAT: CollectionFlatView,
        ViewMode.TREE: CollectionTreeView,
        ViewMode.ALBUM: CollectionAlbumView,
    }

    def __init__(self, source_list: SourceList | None = None):
        self.source_list = source_list

    @classmethod
    def register_collection_view(
        cls, mode: ViewMode, view_class: type[CollectionPage]
    ) -> None:
        """Register the page class used for collections in ``mode``."""
        if not issubclass(view_class, CollectionPage):
            msg = "Collection view class must inherit from CollectionPage"
            raise TypeError(msg)
        logger.info("Registering collection view for mode: %s", mode.name)
        cls._collection_views[mode] = view_class

    @classmethod
    def supported_modes(cls) -> list[ViewMode]:
        return list(cls._collection_views)

    def playlist_view(self, playlist: Playlist) -> ViewPage | None:
        return PlaylistView(playlist)

    def dynamic_playlist_view(self, playlist: DynamicPlaylist) -> ViewPage | None:
        return DynamicPlaylistView(playlist)

    def collection_view(self, collection: Collection, mode: ViewMode) -> ViewPage | None:
        view_class = self._collection_views.get(ViewMode(mode))
        if view_class is None:
            logger.warning("No collection view for mode %s", mode)
            return None
        return view_class([collection])

    def super_collection_view(
        self, collections: list[Collection], mode: ViewMode
    ) -> CollectionPage | None:
        view_class = self._collection_views.get(ViewMode(mode))
        if view_class is None:
            logger.warning("No super collection view for mode %s", mode)
            return None
        return view_class(
            collections,
            title=SUPER_COLLECTION_TITLE,
            description=SUPER_COLLECTION_DESCRIPTION,
        )

    def artist_view(self, artist: Artist) -> ViewPage | None:
        tracks = self._matching_tracks(lambda track: _same(track.artist, artist.name))
        return ArtistInfoView(artist, tracks)

    def album_view(self, album: Album, mode: ModelMode) -> ViewPage | None:
        tracks: list[Track] = []
        if ModelMode(mode) == ModelMode.DATABASE:
            artist_name = album.artist.name if album.artist is not None else None
            tracks = self._matching_tracks(
                lambda track: _same(track.album, album.name)
                and (artist_name is None or _same(track.artist, artist_name))
            )
        return AlbumInfoView(album, tracks, mode)

    def source_view(self, source: Source) -> ViewPage | None:
        return SourceInfoView(source)

    def welcome_page(self) -> ViewPage | None:
        return WelcomePage()

    def whats_hot_page(self) -> ViewPage | None:
        return WhatsHotPage()

    def new_playlist_page(self) -> ViewPage | None:
        return NewPlaylistPage()

    def _matching_tracks(self, predicate) -> list[Track]:
        if self.source_list is None:
            return []
        return [
            track
            for source in self.source_list.sources()
            for track in source.collection.tracks
            if predicate(track)
        ]


def _same(left: str, right: str) -> bool:
    return left.strip().lower() == right.strip().lower()
