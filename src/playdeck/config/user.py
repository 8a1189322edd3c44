# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""User configuration classes for navigation and general settings."""

import json
from pathlib import Path

from pydantic import Field, field_validator

from playdeck.config.base import BaseConfig
from playdeck.models.enums import LandingPage, ViewMode

MAX_FILTER_DEBOUNCE_MS = 5000


class NavigationConfig(BaseConfig):
    """Configuration for view navigation behaviour."""

    filter_debounce_ms: int = Field(
        default=280,
        description="Delay after the last filter keystroke before it is applied",
    )
    history_limit: int = Field(
        default=0,
        description="Maximum number of pages kept in history (0 for no limit)",
    )
    default_view_mode: ViewMode = Field(
        default=ViewMode.TREE,
        description="Mode collection pages open in",
    )
    landing_page: LandingPage = Field(
        default=LandingPage.WELCOME,
        description="Page shown on startup",
    )
    remember_playlist_settings: bool = Field(
        default=True,
        description="Restore shuffle and repeat state per playlist",
    )
    recent_playlists_limit: int = Field(
        default=15,
        description="Maximum number of recently played playlists remembered",
    )

    @field_validator("filter_debounce_ms")
    @classmethod
    def validate_filter_debounce(cls, v: int) -> int:
        """Validate debounce delay is within a usable range."""
        if v < 0 or v > MAX_FILTER_DEBOUNCE_MS:
            msg = f"Filter debounce must be between 0 and {MAX_FILTER_DEBOUNCE_MS} ms"
            raise ValueError(msg)
        return v

    @field_validator("history_limit")
    @classmethod
    def validate_history_limit(cls, v: int) -> int:
        """Validate history limit is 0 (unlimited) or positive."""
        if v < 0:
            msg = "History limit must be 0 (unlimited) or positive"
            raise ValueError(msg)
        return v

    @field_validator("recent_playlists_limit")
    @classmethod
    def validate_recent_limit(cls, v: int) -> int:
        """Validate recent playlists limit is positive."""
        if v <= 0:
            msg = "Recent playlists limit must be positive"
            raise ValueError(msg)
        return v

    @field_validator("default_view_mode")
    @classmethod
    def validate_default_view_mode(cls, v: ViewMode) -> ViewMode:
        """Validate the default mode is a concrete display mode."""
        if v == ViewMode.UNKNOWN:
            msg = "Default view mode must be tree, flat or album"
            raise ValueError(msg)
        return v


class MiscConfig(BaseConfig):
    """Configuration for miscellaneous settings."""

    version: str = Field(default="0.1.0", description="Config file version identifier")


class UserConfig(BaseConfig):
    """Main user configuration containing all sections."""

    navigation: NavigationConfig = Field(
        default_factory=NavigationConfig, description="View navigation settings"
    )
    misc: MiscConfig = Field(
        default_factory=MiscConfig, description="Miscellaneous settings"
    )

    @classmethod
    def from_json_file(cls, file_path: Path | str) -> "UserConfig":
        """Load configuration from a JSON file."""
        if isinstance(file_path, str):
            file_path = Path(file_path)

        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    def to_json_file(self, file_path: Path | str) -> None:
        """Save configuration to a JSON file."""
        if isinstance(file_path, str):
            file_path = Path(file_path)

        # Ensure parent directory exists
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with file_path.open("w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
