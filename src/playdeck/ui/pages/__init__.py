# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""View pages and the capabilities the view manager checks for."""

from .base import (
    HasAutoUpdate,
    HasFilter,
    HasModeSwitch,
    HasPlaylist,
    HasViewSettings,
    ViewPage,
)
from .collection_view import (
    CollectionAlbumView,
    CollectionFlatView,
    CollectionPage,
    CollectionTreeView,
)
from .factory import ViewFactory
from .info_view import AlbumInfoView, ArtistInfoView, SourceInfoView
from .playlist_interface import PlaylistInterface
from .playlist_view import DynamicPlaylistView, PlaylistView
from .static_pages import NewPlaylistPage, StaticPage, WelcomePage, WhatsHotPage

__all__ = [
    "AlbumInfoView",
    "ArtistInfoView",
    "CollectionAlbumView",
    "CollectionFlatView",
    "CollectionPage",
    "CollectionTreeView",
    "DynamicPlaylistView",
    "HasAutoUpdate",
    "HasFilter",
    "HasModeSwitch",
    "HasPlaylist",
    "HasViewSettings",
    "NewPlaylistPage",
    "PlaylistInterface",
    "PlaylistView",
    "SourceInfoView",
    "StaticPage",
    "ViewFactory",
    "ViewPage",
    "WelcomePage",
    "WhatsHotPage",
]
