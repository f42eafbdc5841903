"""
Edit-contact page controller.

Loads one contact into the form through its command handle, then updates it
on submit. A missing contact sends the user back to the list with a toast.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from contactsync.core import LifecycleGuard, BackgroundTask, BackgroundTaskManager
from contactsync.forms import ContactFormCommands
from contactsync.models import Contact, ContactPayload
from contactsync.pages._notify import Notify, resolve_navigator, resolve_notify
from contactsync.protocols import ContactSource, Navigator, HOME_PATH
from contactsync.services.toast_service import ToastType

logger = logging.getLogger(__name__)

CONTACT_NOT_FOUND_MESSAGE = "Contato não encontrado"
EDIT_SUCCESS_MESSAGE = "Contato editado com sucesso!"
EDIT_FAILURE_MESSAGE = "Ocorreu um erro ao editar o contato!"


class EditContactController(QObject):
    """
    Owns the read/update lifecycle of the edit page.

    Usage:
        guard = LifecycleGuard("edit-contact").bind(page_widget)
        page = EditContactController(contact_id, form.commands, ContactsService(), guard)
        page.loading_changed.connect(loader.set_loading)
        page.load_contact()
    """

    loading_changed = pyqtSignal(bool)
    contact_name_changed = pyqtSignal(str)

    def __init__(
        self,
        contact_id: str,
        form: ContactFormCommands,
        contacts: ContactSource,
        guard: LifecycleGuard,
        navigate: Optional[Navigator] = None,
        notify: Optional[Notify] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._contact_id = contact_id
        self._form = form
        self._contacts = contacts
        self._guard = guard
        self._navigate = resolve_navigator(navigate)
        self._notify = resolve_notify(notify)
        self._load_tasks = BackgroundTaskManager(f"contact-{contact_id}-load")
        self._submit_tasks = BackgroundTaskManager(f"contact-{contact_id}-submit")
        self._is_loading = True
        self._contact_name = ""

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def contact_name(self) -> str:
        return self._contact_name

    def load_contact(self) -> BackgroundTask:
        self._set_loading(True)
        return self._load_tasks.run(
            target=self._contacts.get_contact_by_id,
            args=(self._contact_id,),
            on_success=self._guard.guarded(self._on_contact_loaded),
            on_error=self._guard.guarded(self._on_contact_missing),
        )

    def handle_submit(self, payload: ContactPayload) -> BackgroundTask:
        """Send the update; pass this to ContactFormModel.submit()."""
        return self._submit_tasks.run(
            target=self._contacts.update_contact,
            args=(self._contact_id, payload),
            on_success=self._on_contact_updated,
            on_error=self._on_update_failed,
        )

    def dispose(self) -> None:
        """Drop the pending load. A pending update still settles and toasts."""
        self._load_tasks.cleanup()

    def _on_contact_loaded(self, contact: Contact) -> None:
        self._form.set_fields_values(contact)
        self._set_loading(False)
        self._set_contact_name(contact.name)

    def _on_contact_missing(self, error: Exception) -> None:
        logger.warning(f"Could not load contact {self._contact_id}: {error}")
        self._navigate(HOME_PATH)
        self._notify(ToastType.DANGER, CONTACT_NOT_FOUND_MESSAGE)

    def _on_contact_updated(self, contact: Contact) -> None:
        self._guard.run_if_mounted(lambda: self._set_contact_name(contact.name))
        self._notify(ToastType.SUCCESS, EDIT_SUCCESS_MESSAGE)

    def _on_update_failed(self, error: Exception) -> None:
        logger.warning(f"Could not update contact {self._contact_id}: {error}")
        self._notify(ToastType.DANGER, EDIT_FAILURE_MESSAGE)

    def _set_loading(self, is_loading: bool) -> None:
        if is_loading == self._is_loading:
            return
        self._is_loading = is_loading
        self.loading_changed.emit(is_loading)

    def _set_contact_name(self, name: str) -> None:
        self._contact_name = name
        self.contact_name_changed.emit(name)
