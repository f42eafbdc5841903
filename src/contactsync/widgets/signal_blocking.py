"""Context manager for updating widgets without re-entering their handlers."""

from contextlib import contextmanager
import logging

from PyQt6.QtWidgets import QWidget

logger = logging.getLogger(__name__)


@contextmanager
def block_signals(*widgets: QWidget):
    """Block widget signals for the duration of the block; always unblocks."""
    previous = [(widget, widget.blockSignals(True)) for widget in widgets if widget is not None]
    try:
        yield
    finally:
        for widget, was_blocked in previous:
            widget.blockSignals(was_blocked)
