"""Protocols for the remote collaborators consumed by controllers.

Controllers only depend on these shapes, so tests (or another backend) can
stand in for the HTTP services.
"""

from typing import Protocol, Sequence

from contactsync.models import Category, Contact, ContactPayload


class ContactSource(Protocol):
    """Remote contact list/read/write operations."""

    def list_contacts(self, order_by: str = "asc") -> Sequence[Contact]:
        """Return contacts ordered by name in the given direction."""
        ...

    def get_contact_by_id(self, contact_id: str) -> Contact:
        """Return one contact or raise APIError (404 when missing)."""
        ...

    def create_contact(self, payload: ContactPayload) -> Contact:
        ...

    def update_contact(self, contact_id: str, payload: ContactPayload) -> Contact:
        ...


class CategorySource(Protocol):
    """Remote category reference data."""

    def list_categories(self) -> Sequence[Category]:
        ...
