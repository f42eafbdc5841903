"""
Field-keyed validation error store.

Holds at most one error per field. Setting a second error for a field
replaces the first, so a stale message can never linger next to a new one.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Any

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldError:
    """Validation failure tied to one named input."""
    field: str
    message: str


class ValidationErrorStore(QObject):
    """
    In-memory validation error bag with query helpers.

    Examples:
        store = ValidationErrorStore()
        store.set_error("name", "O campo nome é obrigatório")
        store.message_for("name")     # "O campo nome é obrigatório"
        store.is_valid(name_value)    # False while any error is present
        store.remove_error("name")
    """

    errors_changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        # Insertion-ordered; replacing a key keeps its original position
        self._errors: Dict[str, FieldError] = {}

    @property
    def errors(self) -> Tuple[FieldError, ...]:
        return tuple(self._errors.values())

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def set_error(self, field: str, message: str) -> None:
        """Insert or replace the error for field."""
        current = self._errors.get(field)
        if current is not None and current.message == message:
            return
        self._errors[field] = FieldError(field=field, message=message)
        logger.debug(f"Validation error set: {field}={message!r}")
        self.errors_changed.emit()

    def remove_error(self, field: str) -> None:
        """Delete the error for field if present."""
        if self._errors.pop(field, None) is None:
            return
        logger.debug(f"Validation error cleared: {field}")
        self.errors_changed.emit()

    def message_for(self, field: str) -> Optional[str]:
        """Return the current message for field, or None."""
        error = self._errors.get(field)
        return error.message if error else None

    def is_valid(self, *required_values: Any) -> bool:
        """
        True iff there are no errors and every required value is non-empty.

        Args:
            *required_values: Current values of the fields the caller treats
                as required (e.g. the name input)
        """
        return not self._errors and all(required_values)

    def clear(self) -> None:
        if not self._errors:
            return
        self._errors.clear()
        self.errors_changed.emit()
