# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Configuration manager for loading and saving the user configuration.

Sections of the configuration file are validated one at a time, so a bad
navigation value does not throw away the rest of the file. A repaired file
is written back with defaults in place of the sections that failed.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from playdeck.config.user import NavigationConfig, UserConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages application configuration loading, saving, and validation."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = config_path or self._get_default_config_path()
        self.config: UserConfig | None = None
        self.repaired_sections: list[str] = []

    def _get_default_config_path(self) -> Path:
        """Get the default configuration file path."""
        return Path.home() / ".config" / "playdeck" / "config.json"

    def load_config(self) -> UserConfig:
        """Load configuration from file or create default."""
        self.repaired_sections = []
        if not self.config_path.exists():
            self.config = UserConfig()
            self.save_config()
            logger.info("Default configuration created at %s", self.config_path)
            return self.config

        raw = self._read_raw()
        if raw is None:
            self.config = UserConfig()
            return self.config

        self.config = self._build_config(raw)
        if self.repaired_sections:
            logger.warning(
                "Invalid configuration sections reset to defaults: %s",
                ", ".join(self.repaired_sections),
            )
            self.save_config()
        else:
            logger.info("Configuration loaded from %s", self.config_path)
        return self.config

    def _read_raw(self) -> dict[str, Any] | None:
        try:
            with self.config_path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Configuration file is not valid JSON, using defaults: %s", e)
            return None
        except OSError:
            logger.exception("Failed to read configuration, using defaults")
            return None

        if not isinstance(raw, dict):
            logger.warning("Configuration file does not hold an object, using defaults")
            return None
        return raw

    def _build_config(self, raw: dict[str, Any]) -> UserConfig:
        sections: dict[str, BaseModel] = {}
        for name, field in UserConfig.model_fields.items():
            if name not in raw:
                continue
            section_type = field.annotation
            try:
                sections[name] = section_type.model_validate(raw[name])
            except ValidationError as e:
                logger.warning("Invalid %s configuration: %s", name, e)
                self.repaired_sections.append(name)

        for name in raw.keys() - UserConfig.model_fields.keys():
            logger.warning("Ignoring unknown configuration section %r", name)

        return UserConfig(**sections)

    def save_config(self) -> None:
        """Save current configuration to file."""
        if not self.config:
            logger.warning("No configuration to save")
            return

        try:
            self.config.to_json_file(self.config_path)
            logger.info("Configuration saved to %s", self.config_path)
        except OSError:
            logger.exception("Failed to save configuration")

    def get_config(self) -> UserConfig:
        """Get the current configuration, loading it on first use."""
        if not self.config:
            self.load_config()
        return self.config

    def update_config(self, new_config: UserConfig) -> None:
        """Update the configuration and save it."""
        self.config = new_config
        self.save_config()

    def update_navigation(self, **changes: Any) -> NavigationConfig:
        """Apply ``changes`` to the navigation settings and save them.

        All changes are validated together. On ValidationError nothing is
        applied and the file on disk is left as it was.
        """
        config = self.get_config()
        navigation = NavigationConfig.model_validate(
            {**config.navigation.model_dump(), **changes}
        )
        config.navigation = navigation
        self.save_config()
        return navigation
