"""Application configuration for the contact manager.

Provides hooks for applications to point the services at a backend and to
tune notification and animation timing.
"""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "http://localhost:3001"


@dataclass
class AppConfig:
    """Base configuration for contactsync.

    Attributes:
        api_base_url: Root URL of the contacts REST service
        request_timeout_s: Per-request timeout handed to the HTTP client
        toast_duration_ms: How long a toast stays before it starts leaving
        exit_animation_ms: Duration of fade-out animations
        min_search_chars: Search terms shorter than this show the full list
    """

    api_base_url: str = DEFAULT_API_URL
    request_timeout_s: float = 10.0
    toast_duration_ms: int = 7000
    exit_animation_ms: int = 300
    min_search_chars: int = 0

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Build a config from CONTACTSYNC_* environment variables."""
        return cls(
            api_base_url=os.environ.get("CONTACTSYNC_API_URL", DEFAULT_API_URL),
            request_timeout_s=float(os.environ.get("CONTACTSYNC_TIMEOUT_S", "10.0")),
            toast_duration_ms=int(os.environ.get("CONTACTSYNC_TOAST_MS", "7000")),
        )


# Global config instance (set by application)
_app_config: Optional[AppConfig] = None


def set_app_config(config: AppConfig) -> None:
    """Set the global application configuration.

    Args:
        config: AppConfig instance
    """
    global _app_config
    _app_config = config


def get_app_config() -> AppConfig:
    """Get the current application configuration.

    Returns:
        Current AppConfig or default if not set
    """
    if _app_config is None:
        return AppConfig()
    return _app_config
