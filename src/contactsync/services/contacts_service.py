"""Contacts REST collaborator."""

import logging
from typing import Any, List, Optional

from contactsync.errors import DecodeError
from contactsync.models import Contact, ContactPayload
from contactsync.services.contact_mapper import ContactMapper
from contactsync.services.http_client import HttpClient

logger = logging.getLogger(__name__)

VALID_ORDERS = ("asc", "desc")


class ContactsService:
    """List, read and write contacts through the backend's /contacts routes."""

    def __init__(self, client: Optional[HttpClient] = None):
        self._client = client or HttpClient()

    def list_contacts(self, order_by: str = "asc") -> List[Contact]:
        if order_by not in VALID_ORDERS:
            raise ValueError(f"order_by must be one of {VALID_ORDERS}, got {order_by!r}")
        body = self._client.get("/contacts", params={"orderBy": order_by})
        return [ContactMapper.to_domain(item) for item in _expect_list(body, "contacts")]

    def get_contact_by_id(self, contact_id: str) -> Contact:
        body = self._client.get(f"/contacts/{contact_id}")
        return ContactMapper.to_domain(_expect_dict(body, "contact"))

    def create_contact(self, payload: ContactPayload) -> Contact:
        body = self._client.post("/contacts", ContactMapper.to_persistence(payload))
        return ContactMapper.to_domain(_expect_dict(body, "contact"))

    def update_contact(self, contact_id: str, payload: ContactPayload) -> Contact:
        body = self._client.put(f"/contacts/{contact_id}", ContactMapper.to_persistence(payload))
        return ContactMapper.to_domain(_expect_dict(body, "contact"))

    def delete_contact(self, contact_id: str) -> None:
        self._client.delete(f"/contacts/{contact_id}")


def _expect_list(body: Any, what: str) -> list:
    if not isinstance(body, list):
        raise DecodeError(f"Expected a list of {what}, got {type(body).__name__}")
    return body


def _expect_dict(body: Any, what: str) -> dict:
    if not isinstance(body, dict):
        raise DecodeError(f"Expected a {what} object, got {type(body).__name__}")
    return body
