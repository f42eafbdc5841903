"""Contact and category records exchanged with the remote service."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from contactsync.errors import DecodeError


@dataclass(frozen=True)
class Category:
    """Read-only reference data used by the category selector."""
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Category':
        try:
            if data["id"] is None or data["name"] is None:
                raise DecodeError(f"Category record without id or name: {data!r}")
            return cls(id=str(data["id"]), name=str(data["name"]))
        except (KeyError, TypeError) as e:
            raise DecodeError(f"Malformed category record: {data!r}") from e


@dataclass(frozen=True)
class Contact:
    """Transient copy of a contact owned by the remote service."""
    id: str
    name: str
    email: str = ""
    phone: str = ""
    category_id: Optional[str] = None
    category_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Contact':
        """Build a Contact from the REST representation.

        Missing optional fields become empty strings (or None for the category);
        a missing id or name is a decode failure.
        """
        try:
            if data["id"] is None or data["name"] is None:
                raise DecodeError(f"Contact record without id or name: {data!r}")
            category_id = data.get("category_id")
            category_name = data.get("category_name")
            return cls(
                id=str(data["id"]),
                name=str(data["name"]),
                email=_optional_text(data.get("email")),
                phone=_optional_text(data.get("phone")),
                category_id=str(category_id) if category_id is not None else None,
                category_name=str(category_name) if category_name else None,
            )
        except (KeyError, TypeError, AttributeError) as e:
            raise DecodeError(f"Malformed contact record: {data!r}") from e


@dataclass(frozen=True)
class ContactPayload:
    """Field values submitted by the contact form."""
    name: str
    email: str = ""
    phone: str = ""
    category_id: Optional[str] = None


def _optional_text(value: Any) -> str:
    """JSON null becomes ""; scalars such as numeric phones become text."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise DecodeError(f"Expected a text field, got {type(value).__name__}")
    return str(value)
