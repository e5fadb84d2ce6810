"""Entry point for the ring list viewer."""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from .gui import RingWindow


def main() -> int:
    """Launch the PySide6 event loop and show the ring window."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    window = RingWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
