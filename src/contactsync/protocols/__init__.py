"""
Collaborator protocols and application configuration.

Controllers depend on these contracts rather than on concrete services.
"""

from .app_config import AppConfig, set_app_config, get_app_config
from .remote import ContactSource, CategorySource
from .navigation import Navigator, HOME_PATH, register_navigator, get_navigator

__all__ = [
    "AppConfig",
    "set_app_config",
    "get_app_config",
    "ContactSource",
    "CategorySource",
    "Navigator",
    "HOME_PATH",
    "register_navigator",
    "get_navigator",
]
