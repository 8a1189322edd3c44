# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Enums for view modes, playback modes and navigation constants."""

from enum import IntEnum, StrEnum


class ViewMode(IntEnum):
    """Display modes a collection page can be rendered in."""

    UNKNOWN = 0
    TREE = 1  # artist -> album -> track tree
    FLAT = 2  # table of tracks
    ALBUM = 3  # album cover grid


class RepeatMode(IntEnum):
    """Repeat modes of a playlist interface."""

    NONE = 0
    ONE = 1
    ALL = 2


class ModelMode(StrEnum):
    """Where an album page loads its track listing from."""

    DATABASE = "database"
    INFO_SYSTEM = "info_system"


class GeneratorMode(StrEnum):
    """How a dynamic playlist produces its tracks."""

    ON_DEMAND = "on_demand"
    STATIC = "static"


class LandingPage(StrEnum):
    """Page shown when the application starts."""

    WELCOME = "welcome"
    WHATS_HOT = "whats_hot"
    NONE = "none"
