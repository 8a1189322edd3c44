# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Shared fixtures and utilities for UI tests."""

import sys

import pytest
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from playdeck.config.user import NavigationConfig
from playdeck.models.source import SourceList
from playdeck.ui.view_manager import ViewManager
from playdeck.ui.view_settings import ViewSettings


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for testing."""
    if not QApplication.instance():
        app = QApplication(sys.argv)
        app.setApplicationName("PlaydeckTest")
        app.setOrganizationName("playdeck-test")
        yield app
        app.quit()
    else:
        yield QApplication.instance()


# qtbot fixture is provided by pytest-qt plugin


@pytest.fixture
def temp_qsettings(qapp, tmp_path):
    """QSettings backed by a throwaway ini file."""
    settings = QSettings(str(tmp_path / "playdeck.ini"), QSettings.Format.IniFormat)
    yield settings
    settings.clear()


@pytest.fixture
def view_settings(temp_qsettings):
    """ViewSettings writing to a throwaway ini file."""
    return ViewSettings(temp_qsettings, recent_limit=3)


@pytest.fixture
def source_list(qapp, local_source, peer_source):
    """Registry holding the local source and one peer."""
    sources = SourceList()
    sources.add(local_source)
    sources.add(peer_source)
    return sources


@pytest.fixture
def nav_config():
    """Navigation config with a short filter delay for fast tests."""
    return NavigationConfig(filter_debounce_ms=20)


@pytest.fixture
def view_manager(qapp, nav_config, source_list, view_settings):
    """A ViewManager wired to temporary settings and the sample sources."""
    manager = ViewManager(
        config=nav_config, source_list=source_list, settings=view_settings
    )
    return manager


class SignalRecorder:
    """Collects every emission of a signal."""

    def __init__(self, signal):
        self.calls = []
        signal.connect(self._record)

    def _record(self, *args):
        self.calls.append(args[0] if len(args) == 1 else args)

    @property
    def last(self):
        return self.calls[-1] if self.calls else None

    def __len__(self):
        return len(self.calls)


@pytest.fixture
def recorder():
    """Factory fixture: ``recorder(signal)`` returns a SignalRecorder."""
    return SignalRecorder
