# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Base configuration classes with common functionality."""

from pydantic import BaseModel, ConfigDict


class BaseConfig(BaseModel):
    """Base configuration class with common settings."""

    model_config = ConfigDict(
        # Enable validation on assignment
        validate_assignment=True,
        # Keep enum members so callers can compare and dispatch on them
        use_enum_values=False,
        # Reject unknown keys so typos in config files surface early
        extra="forbid",
        # Validate default values
        validate_default=True,
    )
