"""
contactsync: state synchronization layer for a PyQt6 contact manager.

Keeps rendered view state consistent with an asynchronous contacts service,
user-driven field validation and exit-animation timing, without ever mutating
a view that has already been torn down.

Architecture:
- Tier 1 (Core): LifecycleGuard and background tasks on QThread
- Tier 2 (Forms/Animation): validation error store, unmount coordinator
- Tier 3 (Sync): list fetch/retry/ordering controller
- Tier 4 (Services/Pages/Widgets): REST collaborators, view controllers, widgets
"""

__version__ = "0.1.0"

from contactsync.core import LifecycleGuard
from contactsync.forms import ValidationErrorStore, FieldError
from contactsync.animation import UnmountAnimationCoordinator
from contactsync.sync import ListSyncController, ListQuery, ListResult, ListStatus, OrderDirection

__all__ = [
    "__version__",
    "LifecycleGuard",
    "ValidationErrorStore",
    "FieldError",
    "UnmountAnimationCoordinator",
    "ListSyncController",
    "ListQuery",
    "ListResult",
    "ListStatus",
    "OrderDirection",
]
