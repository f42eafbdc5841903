"""Translation between domain records and the REST representation."""

from typing import Any, Dict

from contactsync.models import Contact, ContactPayload


class ContactMapper:
    """Stateless mapper. The REST API uses snake_case category fields."""

    @staticmethod
    def to_persistence(payload: ContactPayload) -> Dict[str, Any]:
        return {
            "name": payload.name,
            "email": payload.email or None,
            "phone": payload.phone or None,
            "category_id": payload.category_id or None,
        }

    @staticmethod
    def to_domain(data: Dict[str, Any]) -> Contact:
        return Contact.from_dict(data)
