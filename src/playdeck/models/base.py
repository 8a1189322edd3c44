# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Base model classes with common functionality."""

from pydantic import BaseModel, ConfigDict


class PlaydeckBaseModel(BaseModel):
    """Base model for all playdeck models with common configuration."""

    model_config = ConfigDict(
        # Enable validation on assignment
        validate_assignment=True,
        # Use enum values instead of enum objects in serialization
        use_enum_values=True,
        # Allow extra fields for extensibility
        extra="allow",
        # Validate default values
        validate_default=True,
        # Enable arbitrary types for complex objects
        arbitrary_types_allowed=True,
    )


class SharedObject(PlaydeckBaseModel):
    """A domain object shared between subsystems and compared by identity.

    Views are cached per object, so two playlists with the same contents are
    still two different keys.
    """

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__
