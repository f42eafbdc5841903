"""
Core lifecycle and concurrency utilities.

Mount guarding and QThread-backed background tasks. No domain logic.
"""

from .lifecycle_guard import LifecycleGuard
from .background_task import BackgroundTask, BackgroundTaskManager

__all__ = [
    "LifecycleGuard",
    "BackgroundTask",
    "BackgroundTaskManager",
]
