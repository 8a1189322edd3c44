# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Lazily built pages keyed by the identity of the object they show."""

import logging
from collections.abc import Callable, Hashable, Iterator
from functools import partial
from typing import Generic, TypeVar

from playdeck.ui.pages.base import ViewPage

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class LazyViewCache(Generic[K]):
    """One page per key, built on first request and forgotten when destroyed.

    The cache does not own its pages: the view stack (the widget's Qt parent)
    does. Entries are dropped when the page widget emits ``destroyed``.
    """

    def __init__(self, name: str, factory: Callable[..., ViewPage | None]):
        self.name = name
        self._factory = factory
        self._entries: dict[K, ViewPage] = {}

    def resolve(self, key: K, *args) -> ViewPage | None:
        """Get the page for ``key``, building it if none is alive.

        Extra ``args`` are passed to the factory and only matter when a page
        is built. Returns None when the factory cannot build a page for ``key``.
        """
        page = self._entries.get(key)
        if page is not None:
            return page

        page = self._factory(key, *args)
        if page is None:
            logger.warning("%s cache: no page can be built for %r", self.name, key)
            return None

        self.insert(key, page)
        logger.debug("%s cache: created %s", self.name, type(page).__name__)
        return page

    def insert(self, key: K, page: ViewPage) -> None:
        """Register an externally built page under ``key``."""
        self._entries[key] = page
        page.widget().destroyed.connect(partial(self._on_page_destroyed, key, page))

    def get(self, key: K) -> ViewPage | None:
        """Get the live page for ``key`` without building one."""
        return self._entries.get(key)

    def key_for(self, page: ViewPage) -> K | None:
        """Get the key ``page`` was registered under."""
        for key, cached in self._entries.items():
            if cached is page:
                return key
        return None

    def discard(self, key: K) -> ViewPage | None:
        """Forget the entry for ``key`` and return its page."""
        return self._entries.pop(key, None)

    def discard_page(self, page: ViewPage) -> bool:
        """Forget every entry pointing at ``page``."""
        keys = [key for key, cached in self._entries.items() if cached is page]
        for key in keys:
            del self._entries[key]
        return bool(keys)

    def pages(self) -> list[ViewPage]:
        return list(self._entries.values())

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._entries))

    def _on_page_destroyed(self, key: K, page: ViewPage, *_args) -> None:
        # A newer page may already be registered under the same key
        if self._entries.get(key) is page:
            del self._entries[key]
            logger.debug("%s cache: pruned destroyed page", self.name)
