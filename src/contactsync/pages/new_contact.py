"""New-contact page controller."""

import logging
from typing import Optional

from PyQt6.QtCore import QObject

from contactsync.core import LifecycleGuard, BackgroundTask, BackgroundTaskManager
from contactsync.forms import ContactFormCommands
from contactsync.models import Contact, ContactPayload
from contactsync.pages._notify import Notify, resolve_notify
from contactsync.protocols import ContactSource
from contactsync.services.toast_service import ToastType

logger = logging.getLogger(__name__)

CREATE_SUCCESS_MESSAGE = "Contato cadastrado com sucesso!"
CREATE_FAILURE_MESSAGE = "Ocorreu um erro ao cadastrar o contato!"


class NewContactController(QObject):
    """Creates a contact and clears the form for the next one."""

    def __init__(
        self,
        form: ContactFormCommands,
        contacts: ContactSource,
        guard: LifecycleGuard,
        notify: Optional[Notify] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._form = form
        self._contacts = contacts
        self._guard = guard
        self._notify = resolve_notify(notify)
        self._tasks = BackgroundTaskManager("contact-create")

    def handle_submit(self, payload: ContactPayload) -> BackgroundTask:
        return self._tasks.run(
            target=self._contacts.create_contact,
            args=(payload,),
            on_success=self._on_created,
            on_error=self._on_failed,
        )

    def dispose(self) -> None:
        """A pending create still settles and toasts; only the form reset is guarded."""
        if self._tasks.has_pending:
            logger.debug("Create still in flight at dispose, its toast will follow")

    def _on_created(self, contact: Contact) -> None:
        logger.info(f"Created contact {contact.id}")
        self._guard.run_if_mounted(self._form.reset_fields)
        self._notify(ToastType.SUCCESS, CREATE_SUCCESS_MESSAGE)

    def _on_failed(self, error: Exception) -> None:
        logger.warning(f"Could not create contact: {error}")
        self._notify(ToastType.DANGER, CREATE_FAILURE_MESSAGE)
