"""Navigator protocol for routing between pages."""

from typing import Protocol, Optional

HOME_PATH = "/"


class Navigator(Protocol):
    """Anything that can move the application to a route path."""

    def __call__(self, path: str) -> None:
        ...


_navigator: Optional[Navigator] = None


def register_navigator(navigator: Navigator) -> None:
    """Register the global navigator used when controllers get none."""
    global _navigator
    _navigator = navigator


def get_navigator() -> Optional[Navigator]:
    """Get the registered navigator."""
    return _navigator
