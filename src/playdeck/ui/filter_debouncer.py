# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Coalesces bursts of filter keystrokes into a single filter update."""

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

logger = logging.getLogger(__name__)


class FilterDebouncer(QObject):
    """Emits ``filter_ready`` with the latest text once typing pauses."""

    filter_ready = pyqtSignal(str)

    def __init__(self, interval_ms: int = 280, parent=None):
        super().__init__(parent)
        self._text = ""
        self._pending = False
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    def interval(self) -> int:
        return self._timer.interval()

    def set_interval(self, interval_ms: int) -> None:
        self._timer.setInterval(interval_ms)

    def text(self) -> str:
        """Get the most recent text, applied or not."""
        return self._text

    def set_text(self, text: str) -> None:
        """Store ``text`` and restart the delay."""
        self._text = text
        self._pending = True
        self._timer.start()

    def is_pending(self) -> bool:
        return self._pending

    def flush(self) -> bool:
        """Apply a pending text right away; returns False if nothing was pending."""
        if not self._pending:
            return False
        self._timer.stop()
        self._on_timeout()
        return True

    def cancel(self) -> None:
        """Drop a pending text without applying it."""
        self._timer.stop()
        self._pending = False

    def _on_timeout(self) -> None:
        self._pending = False
        logger.debug("Applying filter %r", self._text)
        self.filter_ready.emit(self._text)
