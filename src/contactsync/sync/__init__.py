"""Remote list synchronization."""

from .list_sync import (
    ListSyncController,
    ListQuery,
    ListResult,
    ListStatus,
    OrderDirection,
)

__all__ = [
    "ListSyncController",
    "ListQuery",
    "ListResult",
    "ListStatus",
    "OrderDirection",
]
