# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Playdeck models package with the domain objects views are keyed by."""

from playdeck.models.artist import Album, Artist
from playdeck.models.base import PlaydeckBaseModel, SharedObject
from playdeck.models.enums import (
    GeneratorMode,
    LandingPage,
    ModelMode,
    RepeatMode,
    ViewMode,
)
from playdeck.models.playlist import DynamicPlaylist, Playlist
from playdeck.models.source import Collection, Source, SourceList
from playdeck.models.track import Track

__all__ = [
    "Album",
    "Artist",
    "Collection",
    "DynamicPlaylist",
    "GeneratorMode",
    "LandingPage",
    "ModelMode",
    "PlaydeckBaseModel",
    "Playlist",
    "RepeatMode",
    "SharedObject",
    "Source",
    "SourceList",
    "Track",
    "ViewMode",
]
