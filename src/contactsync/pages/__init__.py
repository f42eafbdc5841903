"""Page controllers that compose the forms, guard and services."""

from .edit_contact import (
    EditContactController,
    CONTACT_NOT_FOUND_MESSAGE,
    EDIT_SUCCESS_MESSAGE,
    EDIT_FAILURE_MESSAGE,
)
from .new_contact import (
    NewContactController,
    CREATE_SUCCESS_MESSAGE,
    CREATE_FAILURE_MESSAGE,
)

__all__ = [
    "EditContactController",
    "CONTACT_NOT_FOUND_MESSAGE",
    "EDIT_SUCCESS_MESSAGE",
    "EDIT_FAILURE_MESSAGE",
    "NewContactController",
    "CREATE_SUCCESS_MESSAGE",
    "CREATE_FAILURE_MESSAGE",
]
