# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the playlist interface behind track pages."""

import pytest

from playdeck.models.enums import RepeatMode, ViewMode
from playdeck.ui.pages.playlist_interface import PlaylistInterface


@pytest.fixture
def interface(qapp, sample_tracks):
    return PlaylistInterface(sample_tracks)


class TestPlaylistInterface:
    """Test the PlaylistInterface class."""

    def test_initial_state(self, interface):
        """Test defaults of a new interface."""
        assert interface.track_count() == 4
        assert interface.unfiltered_track_count() == 4
        assert interface.filter() == ""
        assert interface.repeat_mode() == RepeatMode.NONE
        assert not interface.shuffled()
        assert interface.view_mode() == ViewMode.FLAT

    def test_set_tracks_announces_counts(self, interface, recorder, sample_tracks):
        """Test replacing tracks emits both counts."""
        total = recorder(interface.source_track_count_changed)
        shown = recorder(interface.track_count_changed)

        interface.set_tracks(sample_tracks[:1])

        assert total.calls == [1]
        assert shown.calls == [1]

    def test_filter_narrows_tracks(self, interface, recorder):
        """Test filtering keeps matching tracks and reports the new count."""
        shown = recorder(interface.track_count_changed)
        changed = recorder(interface.filter_changed)

        interface.set_filter("  artist b ")

        assert interface.filter() == "artist b"
        assert [t.title for t in interface.filtered_tracks()] == ["Tune"]
        assert interface.unfiltered_track_count() == 4
        assert shown.calls == [1]
        assert changed.calls == ["artist b"]

    def test_same_filter_is_silent(self, interface, recorder):
        """Test re-applying the current filter emits nothing."""
        interface.set_filter("song")
        changed = recorder(interface.filter_changed)

        interface.set_filter("song ")

        assert len(changed) == 0

    def test_repeat_mode(self, interface, recorder):
        """Test repeat mode changes are announced once."""
        changes = recorder(interface.repeat_mode_changed)

        interface.set_repeat_mode(RepeatMode.ALL)
        interface.set_repeat_mode(RepeatMode.ALL)

        assert interface.repeat_mode() == RepeatMode.ALL
        assert changes.calls == [RepeatMode.ALL]

    def test_shuffle(self, interface, recorder):
        """Test shuffle changes are announced once."""
        changes = recorder(interface.shuffle_mode_changed)

        interface.set_shuffled(True)
        interface.set_shuffled(True)

        assert interface.shuffled()
        assert changes.calls == [True]

    def test_unsupported_modes_ignored(self, qapp, recorder):
        """Test interfaces without shuffle or repeat ignore requests."""
        interface = PlaylistInterface(supports_shuffle=False, supports_repeat=False)
        shuffles = recorder(interface.shuffle_mode_changed)
        repeats = recorder(interface.repeat_mode_changed)

        interface.set_shuffled(True)
        interface.set_repeat_mode(RepeatMode.ONE)

        assert not interface.shuffled()
        assert interface.repeat_mode() == RepeatMode.NONE
        assert len(shuffles) == 0
        assert len(repeats) == 0

    def test_child_interfaces(self, qapp):
        """Test nested interfaces are found at any depth."""
        parent = PlaylistInterface()
        child = PlaylistInterface()
        grandchild = PlaylistInterface()
        parent.add_child_interface(child)
        child.add_child_interface(grandchild)
        parent.add_child_interface(parent)

        assert parent.has_child_interface(child)
        assert parent.has_child_interface(grandchild)
        assert not child.has_child_interface(parent)
        assert not parent.has_child_interface(PlaylistInterface())
