# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Sources (local or remote peers), their collections and the source registry."""

import logging

from pydantic import Field, PrivateAttr
from PyQt6.QtCore import QObject, pyqtSignal

from playdeck.models.base import SharedObject
from playdeck.models.track import Track

logger = logging.getLogger(__name__)


class Source(SharedObject):
    """A library owner: the local user or a connected peer."""

    id: str = Field(..., description="Unique source identifier")
    friendly_name: str = Field(default="", description="Name shown in the UI")
    is_local: bool = Field(default=False, description="Whether this is the local user")
    online: bool = Field(default=True, description="Whether the peer is connected")

    _collection: "Collection | None" = PrivateAttr(default=None)

    @property
    def display_name(self) -> str:
        """Get the name shown in page titles."""
        if self.is_local:
            return "My Collection"
        return self.friendly_name or self.id

    @property
    def collection(self) -> "Collection":
        """Get the collection owned by this source, creating it on first use."""
        if self._collection is None:
            self._collection = Collection(name=self.display_name, source=self)
        return self._collection


class Collection(SharedObject):
    """The tracks a source makes available."""

    name: str = Field(default="", description="Collection name")
    source: Source | None = Field(
        None, description="Owning source", exclude=True, repr=False
    )
    tracks: list[Track] = Field(default_factory=list, description="Collection tracks")

    @property
    def track_count(self) -> int:
        """Get the number of tracks in the collection."""
        return len(self.tracks)

    @property
    def artist_count(self) -> int:
        """Get the number of distinct artists in the collection."""
        return len({track.artist.lower() for track in self.tracks if track.artist})

    def add_tracks(self, tracks: list[Track]) -> None:
        """Append tracks to the collection."""
        self.tracks = [*self.tracks, *tracks]


class SourceList(QObject):
    """Registry of every known source."""

    source_added = pyqtSignal(object)  # Source
    source_removed = pyqtSignal(object)  # Source

    def __init__(self, parent=None):
        super().__init__(parent)
        self._sources: list[Source] = []

    def add(self, source: Source) -> None:
        """Register a source; already registered sources are ignored."""
        if source in self._sources:
            return
        self._sources.append(source)
        logger.debug("Source added: %s", source.display_name)
        self.source_added.emit(source)

    def remove(self, source: Source) -> None:
        """Forget a source."""
        if source not in self._sources:
            return
        self._sources.remove(source)
        logger.debug("Source removed: %s", source.display_name)
        self.source_removed.emit(source)

    def sources(self) -> list[Source]:
        """Get all registered sources in registration order."""
        return list(self._sources)

    def local(self) -> Source | None:
        """Get the local source, if registered."""
        return next((source for source in self._sources if source.is_local), None)

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self):
        return iter(list(self._sources))
