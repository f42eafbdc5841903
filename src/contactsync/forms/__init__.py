"""
Form state and validation.

Field-keyed validation errors and the contact form model with its
command handle.
"""

from .validation_errors import ValidationErrorStore, FieldError
from .contact_form import (
    ContactFormModel,
    ContactFormCommands,
    NAME_REQUIRED_MESSAGE,
    INVALID_EMAIL_MESSAGE,
)

__all__ = [
    "ValidationErrorStore",
    "FieldError",
    "ContactFormModel",
    "ContactFormCommands",
    "NAME_REQUIRED_MESSAGE",
    "INVALID_EMAIL_MESSAGE",
]
