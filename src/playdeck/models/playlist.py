# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Playlist and dynamic playlist models."""

from collections.abc import Mapping
from typing import Any, Self
from uuid import uuid4

from pydantic import Field, field_validator

from playdeck.models.base import SharedObject
from playdeck.models.enums import GeneratorMode
from playdeck.models.source import Source
from playdeck.models.track import Track


class Playlist(SharedObject):
    """A user playlist owned by a source."""

    guid: str = Field(
        default_factory=lambda: str(uuid4()), description="Globally unique playlist ID"
    )
    title: str = Field(default="", description="Playlist title")
    info: str = Field(default="", description="Free-form description")
    creator: str = Field(default="", description="Name of the playlist creator")
    author: Source | None = Field(
        None, description="Source that owns the playlist", exclude=True, repr=False
    )
    shared: bool = Field(default=False, description="Whether peers can see it")
    entries: list[Track] = Field(default_factory=list, description="Playlist tracks")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Strip surrounding whitespace from the title."""
        return v.strip()

    @property
    def track_count(self) -> int:
        """Get the number of entries."""
        return len(self.entries)

    @classmethod
    def from_contents(cls, author: Source, contents: Mapping[str, Any]) -> Self:
        """Build a playlist announced by ``author`` from a serialized payload.

        The payload uses the model's own field names; unknown keys are kept as
        extra fields.
        """
        data = dict(contents)
        data.pop("author", None)
        return cls.model_validate({**data, "author": author})


class DynamicPlaylist(Playlist):
    """A playlist whose tracks are produced by a generator."""

    mode: GeneratorMode = Field(
        default=GeneratorMode.STATIC, description="Generation mode"
    )
    generator: str = Field(default="echonest", description="Generator type")
    auto_load: bool = Field(
        default=True, description="Whether the playlist loads on startup"
    )

    @property
    def is_on_demand(self) -> bool:
        """Check whether tracks are generated while playing."""
        return self.mode == GeneratorMode.ON_DEMAND
