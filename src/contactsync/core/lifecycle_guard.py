"""Mount guard that keeps deferred callbacks away from torn-down views."""

import logging
from functools import wraps
from typing import Callable, Optional, Any

from PyQt6.QtCore import QObject

logger = logging.getLogger(__name__)


class LifecycleGuard:
    """
    Tracks whether the owning view instance is still mounted.

    Every deferred state mutation (worker results, timers) goes through
    run_if_mounted(). Once teardown() has run, the guard stays unmounted
    for good and all effects become silent no-ops.

    Usage:
        self._guard = LifecycleGuard()
        self._guard.bind(self)  # Tear down when the widget is destroyed

        def _on_loaded(self, contact):
            self._guard.run_if_mounted(lambda: self._apply(contact))

        def closeEvent(self, event):
            self._guard.teardown()
            super().closeEvent(event)
    """

    def __init__(self, name: Optional[str] = None):
        self._name = name or "view"
        self._mounted = True

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def run_if_mounted(self, effect: Callable[[], Any]) -> None:
        """Invoke effect synchronously if still mounted, otherwise do nothing."""
        if not self._mounted:
            logger.debug(f"LifecycleGuard[{self._name}]: skipped effect after teardown")
            return
        effect()

    def guarded(self, callback: Callable[..., Any]) -> Callable[..., None]:
        """Wrap a callback so it only runs while mounted."""
        @wraps(callback)
        def wrapper(*args, **kwargs):
            self.run_if_mounted(lambda: callback(*args, **kwargs))
        return wrapper

    def teardown(self) -> None:
        """Mark the owner as unmounted. Safe to call any number of times."""
        if self._mounted:
            logger.debug(f"LifecycleGuard[{self._name}]: teardown")
        self._mounted = False

    def bind(self, owner: QObject) -> 'LifecycleGuard':
        """Tear down automatically when owner emits destroyed."""
        owner.destroyed.connect(lambda *_: self.teardown())
        return self
