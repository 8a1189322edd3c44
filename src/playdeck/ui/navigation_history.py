# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Back-navigation history of previously shown pages."""

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class NavigationHistory(Generic[T]):
    """Ordered stack of pages, oldest first.

    The same page is never stored twice in a row. With a positive ``limit``
    the oldest entries are dropped once the stack grows beyond it.
    """

    def __init__(self, limit: int = 0):
        if limit < 0:
            msg = "History limit must be 0 (unlimited) or positive"
            raise ValueError(msg)
        self.limit = limit
        self._entries: list[T] = []

    def push(self, page: T) -> bool:
        """Append ``page``; returns False if it already is the top entry."""
        if self._entries and self._entries[-1] is page:
            return False
        self._entries.append(page)
        if self.limit and len(self._entries) > self.limit:
            del self._entries[: len(self._entries) - self.limit]
        return True

    def pop(self) -> T | None:
        """Remove and return the most recent entry, or None when empty."""
        if not self._entries:
            return None
        return self._entries.pop()

    def peek(self) -> T | None:
        return self._entries[-1] if self._entries else None

    def remove(self, page: T) -> int:
        """Excise every occurrence of ``page`` and return how many were removed."""
        kept = [entry for entry in self._entries if entry is not page]
        removed = len(self._entries) - len(kept)
        if removed:
            # Dropping a page can leave the same page on both sides of the gap
            collapsed: list[T] = []
            for entry in kept:
                if not collapsed or collapsed[-1] is not entry:
                    collapsed.append(entry)
            self._entries = collapsed
        return removed

    def clear(self) -> None:
        self._entries.clear()

    def entries(self) -> list[T]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._entries))

    def __contains__(self, page: object) -> bool:
        return any(entry is page for entry in self._entries)
