# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Tests for the navigation history stack."""

import pytest

from playdeck.ui.navigation_history import NavigationHistory


class Page:
    """Stand-in page compared by identity."""

    def __init__(self, name):
        self.name = name


@pytest.fixture
def pages():
    return [Page(name) for name in "abcde"]


class TestNavigationHistory:
    """Test the NavigationHistory class."""

    def test_empty(self):
        """Test an empty history."""
        history = NavigationHistory()
        assert not history
        assert len(history) == 0
        assert history.pop() is None
        assert history.peek() is None

    def test_negative_limit_rejected(self):
        """Test the limit cannot be negative."""
        with pytest.raises(ValueError, match="History limit"):
            NavigationHistory(limit=-1)

    def test_lifo_order(self, pages):
        """Test pages come back most recent first."""
        a, b, c = pages[:3]
        history = NavigationHistory()
        for page in (a, b, c):
            history.push(page)

        assert history.pop() is c
        assert history.pop() is b
        assert history.pop() is a
        assert history.pop() is None

    def test_no_duplicate_on_top(self, pages):
        """Test pushing the top entry again is ignored."""
        a, b = pages[:2]
        history = NavigationHistory()
        assert history.push(a)
        assert not history.push(a)
        assert history.push(b)
        assert history.push(a)
        assert history.entries() == [a, b, a]

    def test_limit_drops_oldest(self, pages):
        """Test a bounded history forgets the oldest pages."""
        history = NavigationHistory(limit=3)
        for page in pages:
            history.push(page)
        assert history.entries() == pages[2:]

    def test_remove_every_occurrence(self, pages):
        """Test removal excises all entries of a page."""
        a, b, c = pages[:3]
        history = NavigationHistory()
        for page in (a, b, c, b):
            history.push(page)

        assert history.remove(b) == 2
        assert history.entries() == [a, c]
        assert b not in history
        assert history.remove(b) == 0

    def test_remove_collapses_adjacent_duplicates(self, pages):
        """Test removal never leaves the same page twice in a row."""
        a, b = pages[:2]
        history = NavigationHistory()
        for page in (a, b, a):
            history.push(page)

        history.remove(b)

        assert history.entries() == [a]

    def test_contains_uses_identity(self):
        """Test membership is by identity, not equality."""

        class Equal:
            def __eq__(self, other):
                return True

            __hash__ = object.__hash__

        stored = Equal()
        history = NavigationHistory()
        history.push(stored)
        assert stored in history
        assert Equal() not in history

    def test_iteration_and_clear(self, pages):
        """Test iterating oldest first and clearing."""
        history = NavigationHistory()
        for page in pages[:3]:
            history.push(page)
        assert list(history) == pages[:3]

        history.clear()
        assert not history
