"""
Keeps an element rendered until its exit animation has finished.

"Should be removed" (visible=False) and "is still rendered" are separate
states: the element stays in the tree while it fades out and is released
only when the current element's completion signal fires.

State machine:
    Released --visible=True--> Rendered                  (immediate)
    Rendered --visible=False + completion signal--> Released

If no completion signal is ever delivered the element stays rendered.
"""

import logging
from typing import Any, Callable, Optional, Protocol

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class CompletionSignal(Protocol):
    """Bound signal of the animated element, e.g. QPropertyAnimation.finished."""

    def connect(self, slot: Callable[..., Any]) -> Any:
        ...

    def disconnect(self, slot: Callable[..., Any]) -> None:
        ...


class UnmountAnimationCoordinator(QObject):
    """
    Drives should_render from a visibility input and an animation-end signal.

    The completion listener is connected only while visible is False and is
    disconnected on every re-evaluation, on release and on dispose(), so a
    completion from an earlier exit (or another element) is never acted on.

    Usage:
        fade_out = QPropertyAnimation(effect, b"opacity", self)
        self._unmount = UnmountAnimationCoordinator(visible=False, parent=self)
        self._unmount.attach(fade_out.finished)
        self._unmount.should_render_changed.connect(self.setVisible)

        def set_open(self, is_open):
            self._unmount.set_visible(is_open)
            if not is_open:
                fade_out.start()
    """

    should_render_changed = pyqtSignal(bool)

    def __init__(self, visible: bool = False, parent=None):
        super().__init__(parent)
        self._visible = visible
        self._should_render = visible
        self._end_signal: Optional[CompletionSignal] = None
        self._listening_on: Optional[CompletionSignal] = None

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def should_render(self) -> bool:
        return self._should_render

    def set_visible(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        self._reevaluate()

    def attach(self, end_signal: Optional[CompletionSignal]) -> None:
        """Set the completion signal of the current animated element."""
        self._end_signal = end_signal
        self._reevaluate()

    def dispose(self) -> None:
        """Drop the completion listener. Call on teardown."""
        self._detach_listener()
        self._end_signal = None

    def _reevaluate(self) -> None:
        self._detach_listener()

        if self._visible:
            self._set_should_render(True)
            return

        if self._should_render and self._end_signal is not None:
            self._end_signal.connect(self._on_animation_ended)
            self._listening_on = self._end_signal

    def _on_animation_ended(self, *_args) -> None:
        self._detach_listener()
        if not self._visible:
            self._set_should_render(False)

    def _detach_listener(self) -> None:
        if self._listening_on is None:
            return
        try:
            self._listening_on.disconnect(self._on_animation_ended)
        except (TypeError, RuntimeError):
            # Sender already gone or disconnected
            logger.debug("Completion listener was already disconnected")
        self._listening_on = None

    def _set_should_render(self, should_render: bool) -> None:
        if should_render == self._should_render:
            return
        self._should_render = should_render
        logger.debug(f"UnmountAnimationCoordinator: should_render={should_render}")
        self.should_render_changed.emit(should_render)
