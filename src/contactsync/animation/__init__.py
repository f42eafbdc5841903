"""
Exit animation support.

Unmount coordination (keep rendered until the exit animation ends) and
fade-out construction helpers.
"""

from .unmount_coordinator import UnmountAnimationCoordinator, CompletionSignal
from .exit_config import ExitAnimationConfig, create_fade_out

__all__ = [
    "UnmountAnimationCoordinator",
    "CompletionSignal",
    "ExitAnimationConfig",
    "create_fade_out",
]
