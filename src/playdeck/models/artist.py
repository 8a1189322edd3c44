# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Artist and album models."""

from pydantic import Field, field_validator

from playdeck.models.base import SharedObject


class Artist(SharedObject):
    """An artist shown on an artist info page."""

    name: str = Field(..., description="Artist name")
    sort_name: str | None = Field(None, description="Name for sorting purposes")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip surrounding whitespace from the name."""
        return v.strip()

    @property
    def display_name(self) -> str:
        """Get the name used in page titles."""
        return self.name or "Unknown Artist"


class Album(SharedObject):
    """An album shown on an album info page."""

    name: str = Field(..., description="Album title")
    artist: Artist | None = Field(None, description="Album artist")
    year: int | None = Field(None, description="Release year")

    @property
    def display_name(self) -> str:
        """Get the title used in page captions."""
        if self.artist is not None:
            return f"{self.name} by {self.artist.display_name}"
        return self.name
