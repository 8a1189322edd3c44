# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the concrete view pages and their capabilities."""

from PyQt6.QtGui import QPixmap
from PyQt6.QtWidgets import QWidget

from playdeck.models.enums import ModelMode, RepeatMode, ViewMode
from playdeck.ui.pages import (
    AlbumInfoView,
    ArtistInfoView,
    CollectionAlbumView,
    CollectionFlatView,
    CollectionTreeView,
    DynamicPlaylistView,
    HasAutoUpdate,
    HasFilter,
    HasModeSwitch,
    HasPlaylist,
    HasViewSettings,
    NewPlaylistPage,
    PlaylistView,
    SourceInfoView,
    WelcomePage,
    WhatsHotPage,
)


class TestPlaylistView:
    """Test the PlaylistView page."""

    def test_page_basics(self, qapp, sample_playlist):
        """Test title, description and widget."""
        page = PlaylistView(sample_playlist)
        assert page.widget() is page
        assert isinstance(page.widget(), QWidget)
        assert page.title() == "Road Trip"
        assert page.description() == "A playlist by Me"
        assert page.header_label.text() == "Road Trip"
        assert page.visible_count() == 2
        assert not page.is_temporary_page()

    def test_capabilities(self, qapp, sample_playlist):
        """Test which optional capabilities a playlist page offers."""
        page = PlaylistView(sample_playlist)
        assert isinstance(page, HasFilter)
        assert isinstance(page, HasPlaylist)
        assert isinstance(page, HasAutoUpdate)
        assert isinstance(page, HasViewSettings)
        assert not isinstance(page, HasModeSwitch)
        assert page.show_stats_bar()
        assert page.show_filter()
        assert not page.show_modes()

    def test_untitled(self, qapp, local_source):
        """Test a playlist without a title still gets a caption."""
        from playdeck.models.playlist import Playlist

        assert PlaylistView(Playlist(author=local_source)).title() == "Untitled Playlist"

    def test_filter_updates_list(self, qapp, sample_playlist):
        """Test filtering the page narrows the visible rows."""
        page = PlaylistView(sample_playlist)
        page.set_filter("two")
        assert page.filter() == "two"
        assert page.visible_count() == 1

    def test_auto_update_only_for_peers(self, qapp, sample_playlist, peer_playlist):
        """Test local playlists cannot follow upstream changes."""
        local_page = PlaylistView(sample_playlist)
        local_page.set_auto_update(True)
        assert not local_page.can_auto_update()
        assert not local_page.auto_update()

        peer_page = PlaylistView(peer_playlist)
        peer_page.set_auto_update(True)
        assert peer_page.can_auto_update()
        assert peer_page.auto_update()

    def test_view_settings_round_trip(self, qapp, sample_playlist, view_settings):
        """Test shuffle and repeat state survive a new page."""
        page = PlaylistView(sample_playlist)
        interface = page.playlist_interface()
        interface.set_shuffled(True)
        interface.set_repeat_mode(RepeatMode.ALL)
        page.save_view_settings(view_settings)

        restored = PlaylistView(sample_playlist)
        restored.load_view_settings(view_settings)

        assert restored.playlist_interface().shuffled()
        assert restored.playlist_interface().repeat_mode() == RepeatMode.ALL

    def test_reload(self, qapp, sample_playlist, sample_tracks):
        """Test entries changed on the model are picked up."""
        page = PlaylistView(sample_playlist)
        sample_playlist.entries = sample_tracks
        page.reload()
        assert page.visible_count() == 4

    def test_pixmap(self, qapp, sample_playlist):
        """Test the page icon."""
        assert isinstance(PlaylistView(sample_playlist).pixmap(), QPixmap)


class TestDynamicPlaylistView:
    """Test the DynamicPlaylistView page."""

    def test_on_demand_hides_stats(self, qapp, on_demand_playlist):
        """Test on-demand playlists hide stats and filter and cannot shuffle."""
        page = DynamicPlaylistView(on_demand_playlist)
        assert not page.show_stats_bar()
        assert not page.show_filter()
        assert not page.playlist_interface().supports_shuffle()

    def test_static_behaves_like_playlist(self, qapp, local_source):
        """Test static dynamic playlists keep the full toolbar."""
        from playdeck.models.playlist import DynamicPlaylist

        page = DynamicPlaylistView(DynamicPlaylist(title="Gen", author=local_source))
        assert page.show_stats_bar()
        assert page.playlist_interface().supports_shuffle()


class TestCollectionPages:
    """Test the collection page flavours."""

    def test_flavour_modes(self, qapp, local_source):
        """Test each flavour reports its display mode."""
        collection = local_source.collection
        assert CollectionFlatView([collection]).view_mode() == ViewMode.FLAT
        assert CollectionTreeView([collection]).view_mode() == ViewMode.TREE
        assert CollectionAlbumView([collection]).view_mode() == ViewMode.ALBUM

    def test_collection_page_shows_modes(self, qapp, local_source):
        """Test collection pages expose the mode buttons but no mode switch."""
        page = CollectionTreeView([local_source.collection])
        assert page.show_modes()
        assert not isinstance(page, HasModeSwitch)
        assert page.title() == "My Collection"
        assert page.description() == "1 collection"

    def test_album_view_lists_albums_once(self, qapp, local_source):
        """Test the album grid shows one row per album."""
        page = CollectionAlbumView([local_source.collection])
        assert page.visible_count() == 3
        assert page.playlist_interface().unfiltered_track_count() == 4

    def test_add_collection(self, qapp, local_source, peer_source):
        """Test adding collections merges their tracks once."""
        page = CollectionFlatView([local_source.collection], title="All")
        assert page.add_collection(peer_source.collection)
        assert not page.add_collection(peer_source.collection)
        assert page.collections() == [local_source.collection, peer_source.collection]
        assert page.playlist_interface().unfiltered_track_count() == 5
        assert page.title() == "All"


class TestInfoPages:
    """Test artist, album and source pages."""

    def test_artist_page_is_temporary(self, qapp, sample_artist, sample_tracks):
        """Test artist pages are temporary and switch modes themselves."""
        page = ArtistInfoView(sample_artist, sample_tracks[:3])
        assert page.is_temporary_page()
        assert not page.show_stats_bar()
        assert isinstance(page, HasModeSwitch)
        assert page.title() == "Artist A"
        assert page.track_list.item(0).text() == "First Album / Song One"

    def test_artist_page_mode_switch(self, qapp, sample_artist, sample_tracks):
        """Test switching to the flat listing and rejecting album mode."""
        page = ArtistInfoView(sample_artist, sample_tracks[:3])
        page.set_view_mode(ViewMode.FLAT)
        assert page.view_mode() == ViewMode.FLAT
        assert page.track_list.item(0).text() == "Song One"

        assert not page.supports_view_mode(ViewMode.ALBUM)
        page.set_view_mode(ViewMode.ALBUM)
        assert page.view_mode() == ViewMode.FLAT

    def test_album_page(self, qapp, sample_album, sample_tracks):
        """Test album page caption and model mode."""
        page = AlbumInfoView(sample_album, sample_tracks[:2], ModelMode.DATABASE)
        assert page.is_temporary_page()
        assert page.title() == "First Album"
        assert page.description() == "By Artist A"
        assert page.model_mode() == ModelMode.DATABASE
        assert page.visible_count() == 2

    def test_source_page(self, qapp, local_source):
        """Test source page summary."""
        page = SourceInfoView(local_source)
        assert page.title() == "My Collection"
        assert page.description() == "4 tracks by 2 artists"
        assert not page.show_filter()
        assert page.source() is local_source


class TestStaticPages:
    """Test pages that do not render a domain object."""

    def test_welcome_page(self, qapp):
        """Test the welcome page hides the info bar and shows the queue."""
        page = WelcomePage()
        assert page.title() == "Welcome to Playdeck"
        assert not page.show_info_bar()
        assert page.queue_visible()
        assert page.playlist_interface() is None
        assert not isinstance(page, HasFilter)

    def test_other_static_pages(self, qapp):
        """Test captions of the remaining static pages."""
        assert WhatsHotPage().title() == "What's Hot"
        assert NewPlaylistPage().title() == "New Station"
        assert not WhatsHotPage().queue_visible()
        assert WhatsHotPage().jump_to_current_track() is False
