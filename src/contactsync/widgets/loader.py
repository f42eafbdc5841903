"""Busy overlay that fades out before it disappears."""

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QProgressBar

from contactsync.animation import UnmountAnimationCoordinator, ExitAnimationConfig, create_fade_out


class LoaderOverlay(QWidget):
    """
    Indeterminate progress overlay.

    set_loading(False) starts a fade-out; the widget is hidden only when the
    fade-out animation reports it has finished.
    """

    def __init__(self, parent=None, config: Optional[ExitAnimationConfig] = None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._spinner = QProgressBar(self)
        self._spinner.setRange(0, 0)
        self._spinner.setTextVisible(False)
        layout.addWidget(self._spinner)

        self._effect, self._fade_out = create_fade_out(self, config)
        self._unmount = UnmountAnimationCoordinator(visible=False, parent=self)
        self._unmount.attach(self._fade_out.finished)
        self._unmount.should_render_changed.connect(self.setVisible)
        self.setVisible(False)

    @property
    def is_loading(self) -> bool:
        return self._unmount.visible

    @property
    def is_rendered(self) -> bool:
        return self._unmount.should_render

    def set_loading(self, is_loading: bool) -> None:
        was_loading = self._unmount.visible
        self._unmount.set_visible(is_loading)
        if is_loading:
            self._fade_out.stop()
            self._effect.setOpacity(1.0)
        elif was_loading and self._unmount.should_render:
            self._fade_out.start()

    def closeEvent(self, event):
        self._unmount.dispose()
        super().closeEvent(event)
