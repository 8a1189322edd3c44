# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Central navigation controller deciding which page is visible.

The manager resolves "show X" requests to cached pages, records history,
swaps the visible widget and re-publishes the capabilities of the new page
(counts, repeat/shuffle state, available modes and filter) through its own
signals. Create exactly one per application and hand it to whoever needs
to navigate.
"""

import logging
from collections.abc import Callable, Mapping
from contextlib import suppress
from functools import partial
from typing import Any

from PyQt6 import sip
from PyQt6.QtCore import QObject, QTimer, pyqtSignal
from PyQt6.QtWidgets import QStackedWidget

from playdeck.config.user import NavigationConfig
from playdeck.models.artist import Album, Artist
from playdeck.models.enums import LandingPage, ModelMode, RepeatMode, ViewMode
from playdeck.models.playlist import DynamicPlaylist, Playlist
from playdeck.models.source import Collection, Source, SourceList
from playdeck.ui.filter_debouncer import FilterDebouncer
from playdeck.ui.navigation_history import NavigationHistory
from playdeck.ui.pages.base import (
    HasAutoUpdate,
    HasFilter,
    HasModeSwitch,
    HasPlaylist,
    HasViewSettings,
    ViewPage,
)
from playdeck.ui.pages.collection_view import CollectionPage
from playdeck.ui.pages.factory import ViewFactory
from playdeck.ui.pages.playlist_interface import PlaylistInterface
from playdeck.ui.pages.static_pages import NewPlaylistPage
from playdeck.ui.view_cache import LazyViewCache
from playdeck.ui.view_settings import ViewSettings

logger = logging.getLogger(__name__)

COLLECTION_MODES = (ViewMode.FLAT, ViewMode.TREE, ViewMode.ALBUM)

PlaylistBuilder = Callable[[Source, Mapping[str, Any]], Playlist]


class ViewManager(QObject):
    """Owns the visible page, the page history and the page caches."""

    num_sources_changed = pyqtSignal(int)
    num_tracks_changed = pyqtSignal(int)
    num_artists_changed = pyqtSignal(int)
    num_shown_changed = pyqtSignal(int)

    repeat_mode_changed = pyqtSignal(object)  # RepeatMode
    shuffle_mode_changed = pyqtSignal(bool)
    mode_changed = pyqtSignal(object)  # ViewMode

    stats_available = pyqtSignal(bool)
    modes_available = pyqtSignal(bool)
    filter_available = pyqtSignal(bool)
    auto_update_available = pyqtSignal(bool)
    shuffle_available = pyqtSignal(bool)
    repeat_available = pyqtSignal(bool)

    play_clicked = pyqtSignal()
    pause_clicked = pyqtSignal()

    temp_page_activated = pyqtSignal(object)  # ViewPage
    view_page_activated = pyqtSignal(object)  # ViewPage

    show_queue_requested = pyqtSignal()
    hide_queue_requested = pyqtSignal()

    history_changed = pyqtSignal(bool)  # can go back
    info_changed = pyqtSignal(str, str)  # title, description
    filter_text_changed = pyqtSignal(str)  # filter of the new page
    playlist_created = pyqtSignal(object)  # Playlist

    def __init__(
        self,
        config: NavigationConfig | None = None,
        factory: ViewFactory | None = None,
        source_list: SourceList | None = None,
        settings: ViewSettings | None = None,
        stack: QStackedWidget | None = None,
        playlist_builder: PlaylistBuilder | None = None,
        dynamic_playlist_builder: PlaylistBuilder | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self.config = config or NavigationConfig()
        self.source_list = source_list if source_list is not None else SourceList(self)
        self.factory = factory or ViewFactory(self.source_list)
        self.settings = settings
        self._stack = stack if stack is not None else QStackedWidget()
        self._playlist_builder = playlist_builder or Playlist.from_contents
        self._dynamic_playlist_builder = (
            dynamic_playlist_builder or DynamicPlaylist.from_contents
        )

        self._history: NavigationHistory[ViewPage] = NavigationHistory(
            limit=self.config.history_limit
        )
        self._filter = FilterDebouncer(self.config.filter_debounce_ms, self)
        self._filter.filter_ready.connect(self.apply_filter)

        self._playlist_views = LazyViewCache("playlist", self.factory.playlist_view)
        self._dynamic_views = LazyViewCache(
            "dynamic playlist", self.factory.dynamic_playlist_view
        )
        self._collection_views = {
            mode: LazyViewCache(
                f"{mode.name.lower()} collection",
                partial(self._build_collection_view, mode=mode),
            )
            for mode in COLLECTION_MODES
        }
        self._super_views = LazyViewCache(
            "super collection", self._build_super_collection_view
        )
        self._artist_views = LazyViewCache("artist", self.factory.artist_view)
        self._album_views = LazyViewCache("album", self.factory.album_view)
        self._source_views = LazyViewCache("source", self.factory.source_view)
        self._static_pages = LazyViewCache("static page", self._build_static_page)

        self._current_page: ViewPage | None = None
        self._current_collection: Collection | None = None
        default_mode = ViewMode(self.config.default_view_mode)
        self._current_mode = (
            self.settings.view_mode(default_mode) if self.settings else default_mode
        )
        self._links: list[tuple[Any, Any]] = []
        self._watched: dict[int, ViewPage] = {}
        self._stack_alive = True
        self._stack.destroyed.connect(self._on_stack_destroyed)

        self.source_list.source_added.connect(self._on_source_added)

    # --- Queries ---
    def widget(self) -> QStackedWidget:
        """Get the stack holding every shown page widget."""
        return self._stack

    def current_page(self) -> ViewPage | None:
        return self._current_page

    def current_playlist_interface(self) -> PlaylistInterface | None:
        if self._current_page is None:
            return None
        return self._current_page.playlist_interface()

    def current_mode(self) -> ViewMode:
        return self._current_mode

    def current_collection(self) -> Collection | None:
        return self._current_collection

    def history(self) -> list[ViewPage]:
        """Get the pages ``history_back`` would return to, oldest first."""
        return self._history.entries()

    def can_go_back(self) -> bool:
        return bool(self._history)

    def filter_text(self) -> str:
        """Get the latest filter text, whether already applied or pending."""
        return self._filter.text()

    def is_super_collection_visible(self) -> bool:
        page = self._current_page
        return page is not None and any(
            cached is page for cached in self._super_views.pages()
        )

    def is_new_playlist_page_visible(self) -> bool:
        return isinstance(self._current_page, NewPlaylistPage)

    def page_for_playlist(self, playlist: Playlist) -> ViewPage | None:
        return self._playlist_views.get(playlist)

    def page_for_dynamic_playlist(self, playlist: DynamicPlaylist) -> ViewPage | None:
        return self._dynamic_views.get(playlist)

    def page_for_collection(self, collection: Collection) -> ViewPage | None:
        """Get a live page for ``collection``, preferring the current mode."""
        modes = [self._current_mode, *COLLECTION_MODES]
        for mode in modes:
            cache = self._collection_views.get(mode)
            page = cache.get(collection) if cache is not None else None
            if page is not None:
                return page
        return None

    def page_for_interface(self, interface: PlaylistInterface | None) -> ViewPage | None:
        """Find the page whose interface is, or contains, ``interface``."""
        if interface is None:
            return None
        for page in self._known_pages():
            page_interface = page.playlist_interface()
            if page_interface is None:
                continue
            if page_interface is interface or page_interface.has_child_interface(
                interface
            ):
                return page
        return None

    def playlist_for_page(self, page: ViewPage | None) -> Playlist | None:
        if isinstance(page, HasPlaylist):
            return page.playlist()
        return None

    # --- Showing pages ---
    def show(self, page: ViewPage | None, track_history: bool = True) -> ViewPage | None:
        """Make ``page`` the visible page and return it.

        With ``track_history`` the outgoing page is recorded so ``history_back``
        can return to it. Showing the current page again changes nothing.
        """
        if page is None:
            return None
        if page is self._current_page:
            logger.debug("Page %s already shown", page.title())
            return page

        outgoing = self._current_page
        if outgoing is not None:
            self._save_page_settings(outgoing)
            if track_history and self._history.push(outgoing):
                self.history_changed.emit(self.can_go_back())

        self._watch(page)
        widget = page.widget()
        if self._stack.indexOf(widget) < 0:
            self._stack.addWidget(widget)
        self._stack.setCurrentWidget(widget)
        self._current_page = page
        self._current_collection = self._collection_for_page(page)
        if self._trim_current_from_history():
            self.history_changed.emit(self.can_go_back())
        logger.info("Showing page: %s", page.title())

        self._load_page_settings(page)
        self._unlink_interface()
        self._link_interface(page)
        self.update_view()

        if page.is_temporary_page():
            self.temp_page_activated.emit(page)
        else:
            self.view_page_activated.emit(page)
        return page

    def show_playlist(self, playlist: Playlist) -> ViewPage | None:
        shown = self.show(self._playlist_views.resolve(playlist))
        if shown is not None:
            self.num_sources_changed.emit(len(self.source_list))
        return shown

    def show_dynamic_playlist(self, playlist: DynamicPlaylist) -> ViewPage | None:
        shown = self.show(self._dynamic_views.resolve(playlist))
        if shown is not None:
            self.num_sources_changed.emit(len(self.source_list))
        return shown

    def show_artist(self, artist: Artist) -> ViewPage | None:
        return self.show(self._artist_views.resolve(artist))

    def show_album(
        self, album: Album, initial_mode: ModelMode = ModelMode.INFO_SYSTEM
    ) -> ViewPage | None:
        """Show ``album``; ``initial_mode`` only applies when its page is built."""
        return self.show(self._album_views.resolve(album, initial_mode))

    def show_source(self, source: Source) -> ViewPage | None:
        return self.show(self._source_views.resolve(source))

    def show_collection(self, collection: Collection | None) -> ViewPage | None:
        """Show ``collection`` in the current display mode."""
        if collection is None:
            return None
        page =self._collection_views[self._current_mode].resolve(collection)
        shown = self.show(page)
        if shown is not None:
            self.num_sources_changed.emit(1)
            self.num_artists_changed.emit(collection.artist_count)
        return shown

    def show_super_collection(self) -> ViewPage | None:
        """Show the combined collections of every known source."""
        collections = self._super_collections()
        page = self._super_views.resolve(self._current_mode)
        if isinstance(page, CollectionPage):
            for collection in collections:
                page.add_collection(collection)
        shown = self.show(page)
        if shown is not None:
            self.num_sources_changed.emit(len(collections))
            artists = {
                track.artist.lower()
                for collection in collections
                for track in collection.tracks
                if track.artist
            }
            self.num_artists_changed.emit(len(artists))
        return shown

    def show_welcome_page(self) -> ViewPage | None:
        return self.show(self._static_pages.resolve("welcome"))

    def show_whats_hot_page(self) -> ViewPage | None:
        return self.show(self._static_pages.resolve("whats_hot"))

    def show_new_playlist_page(self) -> ViewPage | None:
        return self.show(self._static_pages.resolve("new_playlist"))

    def show_landing_page(self) -> ViewPage | None:
        """Show the start page chosen in the configuration."""
        landing = LandingPage(self.config.landing_page)
        if landing == LandingPage.WELCOME:
            return self.show_welcome_page()
        if landing == LandingPage.WHATS_HOT:
            return self.show_whats_hot_page()
        return None

    def show_current_track(self, interface: PlaylistInterface | None) -> ViewPage | None:
        """Show the page playing from ``interface`` and scroll to its track."""
        page = self.page_for_interface(interface)
        if page is None:
            logger.debug("No page plays the current track")
            return None
        self.show(page)
        page.jump_to_current_track()
        return page

    # --- History ---
    def history_back(self) -> ViewPage | None:
        """Return to the previously shown page; no-op when history is empty."""
        trimmed = self._trim_current_from_history()
        page = self._history.pop()
        if page is None:
            logger.debug("History is empty, staying on the current page")
            if trimmed:
                self.history_changed.emit(False)
            return None
        self.history_changed.emit(self.can_go_back())
        return self.show(page, track_history=False)

    def remove_from_history(self, page: ViewPage) -> int:
        """Forget ``page`` in history; the visible page is never changed."""
        removed = self._history.remove(page)
        trimmed = self._trim_current_from_history()
        if removed or trimmed:
            self.history_changed.emit(self.can_go_back())
        return removed

    # --- Modes ---
    def set_tree_mode(self) -> None:
        self._set_mode(ViewMode.TREE)

    def set_table_mode(self) -> None:
        self._set_mode(ViewMode.FLAT)

    def set_album_mode(self) -> None:
        self._set_mode(ViewMode.ALBUM)

    def set_repeat_mode(self, mode: RepeatMode) -> None:
        interface = self.current_playlist_interface()
        if interface is None:
            logger.debug("Current page has no playlist, ignoring repeat mode")
            return
        interface.set_repeat_mode(mode)

    def set_shuffled(self, enabled: bool) -> None:
        interface = self.current_playlist_interface()
        if interface is None:
            logger.debug("Current page has no playlist, ignoring shuffle")
            return
        interface.set_shuffled(enabled)

    def set_auto_update(self, enabled: bool) -> None:
        page = self._current_page
        if isinstance(page, HasAutoUpdate) and page.can_auto_update():
            page.set_auto_update(enabled)
        else:
            logger.debug("Current page cannot auto update")

    # --- Filter ---
    def set_filter(self, text: str) -> None:
        """Queue ``text`` for the current page; bursts are coalesced."""
        self._filter.set_text(text)

    def apply_filter(self, text: str | None = None) -> None:
        """Apply the latest filter text to whichever page is current now."""
        if text is None:
            text = self._filter.text()
        page = self._current_page
        if isinstance(page, HasFilter):
            page.set_filter(text)
        else:
            logger.debug("Current page cannot be filtered")

    # --- Playback and queue requests ---
    def play(self) -> None:
        self.play_clicked.emit()

    def pause(self) -> None:
        self.pause_clicked.emit()

    def show_queue(self) -> None:
        self.show_queue_requested.emit()

    def hide_queue(self) -> None:
        self.hide_queue_requested.emit()

    # --- Playlist creation ---
    def create_playlist(
        self, source: Source, contents: Mapping[str, Any]
    ) -> ViewPage | None:
        """Build a playlist announced by ``source`` and show it."""
        playlist = self._playlist_builder(source, contents)
        logger.info(
            "Playlist '%s' created by %s", playlist.title, source.display_name
        )
        self.playlist_created.emit(playlist)
        return self.show_playlist(playlist)

    def create_dynamic_playlist(
        self, source: Source, contents: Mapping[str, Any]
    ) -> ViewPage | None:
        """Build a dynamic playlist announced by ``source`` and show it."""
        playlist = self._dynamic_playlist_builder(source, contents)
        logger.info(
            "Dynamic playlist '%s' created by %s", playlist.title, source.display_name
        )
        self.playlist_created.emit(playlist)
        return self.show_dynamic_playlist(playlist)

    def playlist_interface_changed(self, interface: PlaylistInterface | None) -> None:
        """Remember the playlist behind a newly playing interface."""
        playlist = self.playlist_for_page(self.page_for_interface(interface))
        if playlist is None or self.settings is None:
            return
        self.settings.append_recent_playlist(playlist.guid)
        logger.debug("Recently played: %s", playlist.title)

    # --- Republishing ---
    def update_view(self) -> None:
        """Publish the capabilities and state of the current page."""
        page = self._current_page
        if page is None:
            return
        interface = page.playlist_interface()
        stats = page.show_stats_bar()

        if interface is not None and stats:
            self.num_tracks_changed.emit(interface.unfiltered_track_count())
            if interface.filter():
                self.num_shown_changed.emit(interface.track_count())
            else:
                self.num_shown_changed.emit(interface.unfiltered_track_count())
            self.repeat_mode_changed.emit(interface.repeat_mode())
            self.shuffle_mode_changed.emit(interface.shuffled())
            self.mode_changed.emit(interface.view_mode())

        if page.queue_visible():
            self.show_queue()
        else:
            self.hide_queue()

        has_filter = isinstance(page, HasFilter)
        self.stats_available.emit(stats)
        self.modes_available.emit(page.show_modes())
        self.filter_available.emit(has_filter and page.show_filter())
        self.shuffle_available.emit(
            interface is not None and interface.supports_shuffle()
        )
        self.repeat_available.emit(interface is not None and interface.supports_repeat())
        self.auto_update_available.emit(
            isinstance(page, HasAutoUpdate) and page.can_auto_update()
        )
        self.filter_text_changed.emit(page.filter() if has_filter else "")
        self.info_changed.emit(page.title(), page.description())

    # --- Internals ---
    def _set_mode(self, mode: ViewMode) -> None:
        page = self._current_page
        collection_visible = self._is_collection_page(page)
        if not collection_visible and isinstance(page, HasModeSwitch):
            if page.supports_view_mode(mode):
                page.set_view_mode(mode)
                self.mode_changed.emit(mode)
            else:
                logger.debug("Current page does not support mode %s", mode.name)
            return

        changed = mode != self._current_mode
        self._current_mode = mode
        if self.settings is not None:
            self.settings.set_view_mode(mode)
        if self.is_super_collection_visible():
            self.show_super_collection()
        elif collection_visible:
            self.show_collection(self._current_collection)
        if changed:
            self.mode_changed.emit(mode)

    def _is_collection_page(self, page: ViewPage | None) -> bool:
        if page is None:
            return False
        if any(cached is page for cached in self._super_views.pages()):
            return True
        if self._current_collection is None:
            return False
        return any(
            cache.get(self._current_collection) is page
            for cache in self._collection_views.values()
        )

    def _link_interface(self, page: ViewPage) -> None:
        interface = page.playlist_interface()
        if interface is None:
            return
        links = [
            (interface.source_track_count_changed, self.num_tracks_changed),
            (interface.track_count_changed, self.num_shown_changed),
            (interface.repeat_mode_changed, self.repeat_mode_changed),
            (interface.shuffle_mode_changed, self.shuffle_mode_changed),
        ]
        for signal, slot in links:
            signal.connect(slot)
        self._links = links

    def _unlink_interface(self) -> None:
        for signal, slot in self._links:
            # The interface may already be gone together with its page
            with suppress(TypeError, RuntimeError):
                signal.disconnect(slot)
        self._links = []

    def _save_page_settings(self, page: ViewPage) -> None:
        if self.settings is None or not self.config.remember_playlist_settings:
            return
        if isinstance(page, HasViewSettings):
            page.save_view_settings(self.settings)

    def _load_page_settings(self, page: ViewPage) -> None:
        if self.settings is None or not self.config.remember_playlist_settings:
            return
        if isinstance(page, HasViewSettings):
            page.load_view_settings(self.settings)

    def _watch(self, page: ViewPage) -> None:
        widget = page.widget()
        address = sip.unwrapinstance(widget)
        if address in self._watched:
            return
        self._watched[address] = page
        # Bound slot so the connection dies with the manager
        widget.destroyed.connect(self._on_widget_destroyed)

    def _on_widget_destroyed(self, widget: QObject | None = None) -> None:
        if sip.isdeleted(self):
            return
        page = None
        if widget is not None:
            with suppress(RuntimeError):
                page = self._watched.pop(sip.unwrapinstance(widget), None)
        if page is None:
            # The wrapper may already be invalidated, find the page by its widget
            for address, watched in list(self._watched.items()):
                if sip.isdeleted(watched.widget()):
                    page = self._watched.pop(address)
                    break
        if page is None:
            logger.debug("Destroyed widget did not belong to a known page")
            return
        self._forget_page(page)

    def _forget_page(self, page: ViewPage) -> None:
        removed = self._history.remove(page)
        trimmed = self._trim_current_from_history()
        if removed or trimmed:
            self.history_changed.emit(self.can_go_back())
        for cache in self._caches():
            cache.discard_page(page)

        if page is self._current_page:
            logger.info("Visible page was destroyed")
            self._unlink_interface()
            self._current_page = None
            if not self._stack_alive:
                return
            # The widget is still being torn down, pick a replacement afterwards
            QTimer.singleShot(0, self._show_fallback_page)

    def _show_fallback_page(self) -> None:
        if self._current_page is not None or not self._stack_alive:
            return
        page = self._history.pop()
        if page is not None:
            self.history_changed.emit(self.can_go_back())
            self.show(page, track_history=False)
        else:
            self.show_landing_page()

    def _on_stack_destroyed(self, *_args) -> None:
        self._stack_alive = False
        logger.debug("View stack destroyed, pages will not be replaced")

    def _trim_current_from_history(self) -> bool:
        """Drop history entries on top that equal the visible page."""
        page = self._current_page
        trimmed = False
        while page is not None and self._history.peek() is page:
            self._history.pop()
            trimmed = True
        return trimmed

    def _collection_for_page(self, page: ViewPage) -> Collection | None:
        for cache in self._collection_views.values():
            collection = cache.key_for(page)
            if collection is not None:
                return collection
        return None

    def _on_source_added(self, source: Source) -> None:
        for page in self._super_views.pages():
            if isinstance(page, CollectionPage):
                page.add_collection(source.collection)
        if self.is_super_collection_visible():
            self.num_sources_changed.emit(len(self._super_collections()))
            self.update_view()

    def _super_collections(self) -> list[Collection]:
        return [source.collection for source in self.source_list.sources()]

    def _build_collection_view(self, collection: Collection, mode: ViewMode):
        return self.factory.collection_view(collection, mode)

    def _build_super_collection_view(self, mode: ViewMode):
        return self.factory.super_collection_view(self._super_collections(), mode)

    def _build_static_page(self, name: str):
        builders = {
            "welcome": self.factory.welcome_page,
            "whats_hot": self.factory.whats_hot_page,
            "new_playlist": self.factory.new_playlist_page,
        }
        builder = builders.get(name)
        return builder() if builder is not None else None

    def _caches(self) -> list[LazyViewCache]:
        return [
            self._playlist_views,
            self._dynamic_views,
            *self._collection_views.values(),
            self._super_views,
            self._artist_views,
            self._album_views,
            self._source_views,
            self._static_pages,
        ]

    def _known_pages(self) -> list[ViewPage]:
        pages: list[ViewPage] = []
        candidates = [self._current_page, *reversed(self._history.entries())]
        for cache in self._caches():
            candidates.extend(cache.pages())
        for page in candidates:
            if page is not None and not any(known is page for known in pages):
                pages.append(page)
        return pages
