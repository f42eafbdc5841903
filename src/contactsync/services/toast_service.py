"""
Fire-and-forget toast notifications.

Producers call toast(); whatever widget is listening on
ToastService.instance().toast_added renders the message. Nobody
acknowledges or retries.
"""

import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from PyQt6.QtCore import QObject, pyqtSignal

from contactsync.protocols import get_app_config

logger = logging.getLogger(__name__)


class ToastType(Enum):
    DEFAULT = "default"
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class ToastMessage:
    """Immutable notification handed to the toast container."""
    id: int
    type: ToastType
    text: str
    duration_ms: int


class ToastService(QObject):
    """Singleton notification bus."""

    toast_added = pyqtSignal(object)  # ToastMessage

    _instance = None

    def __init__(self, parent=None):
        super().__init__(parent)
        self._ids = itertools.count(1)

    @classmethod
    def instance(cls) -> 'ToastService':
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def toast(
        self,
        type: Union[ToastType, str],
        text: str,
        duration_ms: Optional[int] = None,
    ) -> ToastMessage:
        message = ToastMessage(
            id=next(self._ids),
            type=ToastType(type),
            text=text,
            duration_ms=duration_ms if duration_ms is not None else get_app_config().toast_duration_ms,
        )
        logger.info(f"Toast [{message.type.value}]: {text}")
        self.toast_added.emit(message)
        return message


def toast(type: Union[ToastType, str], text: str, duration_ms: Optional[int] = None) -> ToastMessage:
    """Publish a toast on the global bus."""
    return ToastService.instance().toast(type, text, duration_ms)
