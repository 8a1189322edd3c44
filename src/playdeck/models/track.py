# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Track model used by playlists and collections."""

from pydantic import Field, field_validator

from playdeck.models.base import PlaydeckBaseModel


class Track(PlaydeckBaseModel):
    """A single playable track."""

    title: str = Field(..., description="Track title")
    artist: str = Field(default="", description="Artist name")
    album: str = Field(default="", description="Album name")
    duration: int = Field(default=0, description="Duration in seconds")

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: int) -> int:
        """Validate duration is non-negative."""
        if v < 0:
            msg = "Duration must be non-negative"
            raise ValueError(msg)
        return v

    @property
    def duration_formatted(self) -> str:
        """Get duration in MM:SS format."""
        minutes, seconds = divmod(self.duration, 60)
        return f"{minutes:02d}:{seconds:02d}"

    def match(self, text: str) -> bool:
        """Check whether every word of ``text`` occurs in artist, album or title."""
        haystack = f"{self.artist} {self.album} {self.title}".lower()
        return all(word in haystack for word in text.lower().split())
