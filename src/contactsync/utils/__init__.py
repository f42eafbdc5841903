"""Pure helpers with no Qt dependency."""

from .formatting import format_phone, is_email_valid, contact_count_label, MAX_PHONE_DIGITS

__all__ = [
    "format_phone",
    "is_email_valid",
    "contact_count_label",
    "MAX_PHONE_DIGITS",
]
