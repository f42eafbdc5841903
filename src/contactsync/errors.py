"""Error hierarchy for remote collaborator failures."""

from typing import Any, Optional


class ContactSyncError(Exception):
    """Base for all contactsync errors."""


class ServiceError(ContactSyncError):
    """A remote operation failed to produce a usable result."""


class APIError(ServiceError):
    """Remote service answered with a non-success status."""

    def __init__(self, status_code: int, body: Any = None, message: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        if message is None:
            message = f"Remote service answered with HTTP {status_code}"
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class NetworkError(ServiceError):
    """Remote service could not be reached."""


class DecodeError(ServiceError):
    """Response body could not be decoded into the expected shape."""
