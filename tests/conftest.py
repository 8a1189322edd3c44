# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Global pytest configuration and model fixtures for playdeck tests."""

import os

import pytest

from playdeck.models.artist import Album, Artist
from playdeck.models.playlist import DynamicPlaylist, Playlist
from playdeck.models.source import Source
from playdeck.models.track import Track

# Widgets are created in every UI test; never require a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def sample_tracks():
    """A small library spanning two artists and three albums."""
    return [
        Track(title="Song One", artist="Artist A", album="First Album", duration=185),
        Track(title="Song Two", artist="Artist A", album="First Album", duration=203),
        Track(title="Other Song", artist="Artist A", album="Second Album", duration=99),
        Track(title="Tune", artist="Artist B", album="Mixed Bag", duration=240),
    ]


@pytest.fixture
def local_source(sample_tracks):
    """The local user's source with the sample tracks in its collection."""
    source = Source(id="local", is_local=True)
    source.collection.add_tracks(sample_tracks)
    return source


@pytest.fixture
def peer_source():
    """A connected peer sharing one track."""
    source = Source(id="peer-1", friendly_name="Alice")
    source.collection.add_tracks(
        [Track(title="Shared Song", artist="Artist C", album="Peer Album", duration=60)]
    )
    return source


@pytest.fixture
def sample_playlist(local_source, sample_tracks):
    """A local playlist holding the first two sample tracks."""
    return Playlist(
        title="Road Trip", creator="Me", author=local_source, entries=sample_tracks[:2]
    )


@pytest.fixture
def peer_playlist(peer_source, sample_tracks):
    """A playlist owned by a peer."""
    return Playlist(title="Alice's Mix", author=peer_source, entries=sample_tracks)


@pytest.fixture
def on_demand_playlist(local_source):
    """A dynamic playlist generating its tracks while playing."""
    return DynamicPlaylist(title="Radio", author=local_source, mode="on_demand")


@pytest.fixture
def sample_artist():
    return Artist(name="Artist A")


@pytest.fixture
def sample_album(sample_artist):
    return Album(name="First Album", artist=sample_artist, year=2001)
