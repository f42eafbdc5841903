"""Shared plumbing for page controllers."""

import logging
from typing import Callable, Optional

from contactsync.protocols import Navigator, get_navigator
from contactsync.services.toast_service import ToastMessage, ToastType, toast

logger = logging.getLogger(__name__)

Notify = Callable[[ToastType, str], Optional[ToastMessage]]


def resolve_navigator(navigate: Optional[Navigator]) -> Navigator:
    """Return navigate, the registered navigator, or a logging fallback."""
    if navigate is not None:
        return navigate
    registered = get_navigator()
    if registered is not None:
        return registered

    def _unrouted(path: str) -> None:
        logger.warning(f"No navigator registered; cannot route to {path!r}")
    return _unrouted


def resolve_notify(notify: Optional[Notify]) -> Notify:
    return notify if notify is not None else toast
