"""Stack of toast messages that leave through a fade-out."""

import logging
from typing import Dict, Optional, Tuple

from PyQt6.QtCore import QTimer, pyqtSignal
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from contactsync.animation import UnmountAnimationCoordinator, ExitAnimationConfig, create_fade_out
from contactsync.services.toast_service import ToastMessage, ToastService, ToastType

logger = logging.getLogger(__name__)

TOAST_COLORS = {
    ToastType.DEFAULT: "#5061FC",
    ToastType.SUCCESS: "#51CA73",
    ToastType.DANGER: "#FC5050",
}


class ToastWidget(QFrame):
    """One toast. Dismissed by timeout or click, removed after its fade-out."""

    removed = pyqtSignal(int)  # toast id

    def __init__(self, message: ToastMessage, config: Optional[ExitAnimationConfig] = None, parent=None):
        super().__init__(parent)
        self.message = message
        self.setStyleSheet(
            f"background: {TOAST_COLORS[message.type]}; color: #FFFFFF;"
            f" border-radius: 4px; padding: 12px;"
        )
        layout = QVBoxLayout(self)
        layout.addWidget(QLabel(message.text, self))

        self._effect, self._fade_out = create_fade_out(self, config)
        self._unmount = UnmountAnimationCoordinator(visible=True, parent=self)
        self._unmount.attach(self._fade_out.finished)
        self._unmount.should_render_changed.connect(self._on_should_render_changed)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.dismiss)
        if message.duration_ms > 0:
            self._timer.start(message.duration_ms)

    @property
    def is_leaving(self) -> bool:
        return not self._unmount.visible

    def dismiss(self) -> None:
        if self.is_leaving:
            return
        self._timer.stop()
        self._unmount.set_visible(False)
        self._fade_out.start()

    def mousePressEvent(self, event):
        self.dismiss()
        super().mousePressEvent(event)

    def _on_should_render_changed(self, should_render: bool) -> None:
        if should_render:
            return
        self.hide()
        self._unmount.dispose()
        self.removed.emit(self.message.id)


class ToastContainer(QWidget):
    """Listens on the toast bus and shows each message until it leaves."""

    def __init__(
        self,
        service: Optional[ToastService] = None,
        config: Optional[ExitAnimationConfig] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._config = config
        self._toasts: Dict[int, ToastWidget] = {}
        self._layout = QVBoxLayout(self)
        self._service = service or ToastService.instance()
        self._service.toast_added.connect(self.add_toast)

    @property
    def toast_ids(self) -> Tuple[int, ...]:
        return tuple(self._toasts)

    def toast_widget(self, toast_id: int) -> Optional[ToastWidget]:
        return self._toasts.get(toast_id)

    def add_toast(self, message: ToastMessage) -> ToastWidget:
        widget = ToastWidget(message, self._config, parent=self)
        widget.removed.connect(self._remove_toast)
        self._toasts[message.id] = widget
        self._layout.addWidget(widget)
        return widget

    def _remove_toast(self, toast_id: int) -> None:
        widget = self._toasts.pop(toast_id, None)
        if widget is None:
            return
        logger.debug(f"Toast {toast_id} removed")
        self._layout.removeWidget(widget)
        widget.deleteLater()

    def closeEvent(self, event):
        try:
            self._service.toast_added.disconnect(self.add_toast)
        except TypeError:
            logger.debug("Toast container was not connected to the toast bus")
        super().closeEvent(event)
