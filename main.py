# Copyright (c) 2025 playdeck and contributors. All rights reserved.
# Licensed under the MIT license. See LICENSE file in the project root for details.

"""Main entry point for the playdeck application."""

import logging
import sys

import qtawesome as qta
from PyQt6.QtWidgets import QApplication

from playdeck.ui.main_window import MainWindow

logging.basicConfig(format="%(levelname)s:%(name)s:%(message)s", level=logging.INFO)


def main() -> None:
    """Execute main function to run the playdeck application."""
    app = QApplication(sys.argv)

    # Set application properties
    app.setApplicationName("Playdeck")
    app.setApplicationDisplayName("Playdeck - Music Player")
    app.setApplicationVersion("0.1.0")
    app.setOrganizationName("playdeck")
    app.setOrganizationDomain("playdeck.app")
    app.setWindowIcon(qta.icon("fa5s.compact-disc"))

    # Create and show main window
    window = MainWindow()
    window.show()

    # Start the event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
