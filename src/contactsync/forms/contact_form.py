"""
Contact form state.

ContactFormModel holds the field values, validation errors, category list
and submission flag of one contact form. Pages never touch that state
directly; they hold the ContactFormCommands handle instead.
"""

import logging
from typing import Callable, Optional, Tuple

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from contactsync.core import LifecycleGuard, BackgroundTaskManager
from contactsync.forms.validation_errors import ValidationErrorStore
from contactsync.models import Category, Contact, ContactPayload
from contactsync.protocols import CategorySource
from contactsync.utils import format_phone, is_email_valid

logger = logging.getLogger(__name__)

NAME_FIELD = "name"
EMAIL_FIELD = "email"

NAME_REQUIRED_MESSAGE = "O campo nome é obrigatório"
INVALID_EMAIL_MESSAGE = "E-mail inválido"

SubmitHandler = Callable[[ContactPayload], Optional[QThread]]


class ContactFormCommands:
    """
    Command handle a parent page uses to push values into the form.

    Exposes exactly two operations; the rest of the form's state stays
    private to ContactFormModel.
    """

    def __init__(self, form: 'ContactFormModel'):
        self._form = form

    def set_fields_values(self, contact: Contact) -> None:
        self._form._apply_fields(
            name=contact.name or "",
            email=contact.email or "",
            phone=format_phone(contact.phone or ""),
            category_id=contact.category_id or "",
        )

    def reset_fields(self) -> None:
        self._form._apply_fields(name="", email="", phone="", category_id="")


class ContactFormModel(QObject):
    """
    Field values and derived validity for one contact form.

    Usage:
        form = ContactFormModel(CategoriesService())
        form.load_categories()

        name_edit.textEdited.connect(form.set_name)
        form.changed.connect(refresh_widgets)

        # Page side
        page = EditContactController(contact_id, form.commands, ...)
        submit_button.clicked.connect(lambda: form.submit(page.handle_submit))
    """

    changed = pyqtSignal()
    categories_changed = pyqtSignal()
    submitting_changed = pyqtSignal(bool)

    def __init__(
        self,
        categories_source: CategorySource,
        guard: Optional[LifecycleGuard] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._categories_source = categories_source
        self._guard = guard or LifecycleGuard("contact-form")
        self._tasks = BackgroundTaskManager("categories")
        self._errors = ValidationErrorStore(self)
        self._errors.errors_changed.connect(self.changed)

        self._name = ""
        self._email = ""
        self._phone = ""
        self._category_id = ""
        self._categories: Tuple[Category, ...] = ()
        self._is_loading_categories = True
        self._is_submitting = False

        self.commands = ContactFormCommands(self)

    # ========== STATE ==========

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def category_id(self) -> str:
        return self._category_id

    @property
    def categories(self) -> Tuple[Category, ...]:
        return self._categories

    @property
    def errors(self) -> ValidationErrorStore:
        return self._errors

    @property
    def is_loading_categories(self) -> bool:
        return self._is_loading_categories

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def is_form_valid(self) -> bool:
        return self._errors.is_valid(self._name)

    @property
    def tasks(self) -> BackgroundTaskManager:
        return self._tasks

    def payload(self) -> ContactPayload:
        return ContactPayload(
            name=self._name,
            email=self._email,
            phone=self._phone,
            category_id=self._category_id or None,
        )

    # ========== INPUT HANDLERS ==========

    def set_name(self, value: str) -> None:
        self._name = value
        if not value:
            self._errors.set_error(NAME_FIELD, NAME_REQUIRED_MESSAGE)
        else:
            self._errors.remove_error(NAME_FIELD)
        self.changed.emit()

    def set_email(self, value: str) -> None:
        # Email is optional: blank is valid, anything else must be well formed
        self._email = value
        if value and not is_email_valid(value):
            self._errors.set_error(EMAIL_FIELD, INVALID_EMAIL_MESSAGE)
        else:
            self._errors.remove_error(EMAIL_FIELD)
        self.changed.emit()

    def set_phone(self, value: str) -> None:
        self._phone = format_phone(value)
        self.changed.emit()

    def set_category_id(self, value: Optional[str]) -> None:
        self._category_id = value or ""
        self.changed.emit()

    # ========== CATEGORIES ==========

    def load_categories(self) -> None:
        """Fetch categories. A failure leaves the list empty, never a form error."""
        self._is_loading_categories = True
        self.categories_changed.emit()
        self._tasks.run(
            target=self._categories_source.list_categories,
            on_success=self._guard.guarded(self._on_categories_loaded),
            on_error=self._guard.guarded(self._on_categories_failed),
        )

    def _on_categories_loaded(self, categories) -> None:
        self._categories = tuple(categories or ())
        self._is_loading_categories = False
        self.categories_changed.emit()

    def _on_categories_failed(self, error: Exception) -> None:
        logger.warning(f"Categories unavailable, continuing without them: {error}")
        self._categories = ()
        self._is_loading_categories = False
        self.categories_changed.emit()

    # ========== SUBMISSION ==========

    def submit(self, on_submit: SubmitHandler) -> bool:
        """
        Hand the current payload to on_submit.

        If on_submit returns a running task, the form stays in the submitting
        state until that task finishes.

        Returns:
            False if the form is invalid or already submitting
        """
        if self._is_submitting or not self.is_form_valid:
            return False

        self._set_submitting(True)
        task = on_submit(self.payload())
        if task is None:
            self._set_submitting(False)
            return True

        task.finished.connect(self._guard.guarded(lambda: self._set_submitting(False)))
        if task.isFinished():
            self._set_submitting(False)
        return True

    def _set_submitting(self, submitting: bool) -> None:
        if submitting == self._is_submitting:
            return
        self._is_submitting = submitting
        self.submitting_changed.emit(submitting)

    # ========== COMMANDS ==========

    def _apply_fields(self, name: str, email: str, phone: str, category_id: str) -> None:
        self._name = name
        self._email = email
        self._phone = phone
        self._category_id = category_id
        self._errors.clear()
        self.changed.emit()

    def dispose(self) -> None:
        self._guard.teardown()
        self._tasks.cleanup()
