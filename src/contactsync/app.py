"""
Main window and entry point.

Routes:
    "/"           contact list
    "/new"        new contact form
    "/edit/<id>"  edit contact form

Every route change tears down the previous page: its LifecycleGuard goes
unmounted before the widget is scheduled for deletion, so fetches still in
flight settle into a no-op.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from PyQt6.QtWidgets import (
    QApplication, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget,
)

from contactsync.core import LifecycleGuard
from contactsync.forms import ContactFormModel
from contactsync.pages import EditContactController, NewContactController
from contactsync.protocols import (
    AppConfig, CategorySource, ContactSource, HOME_PATH, register_navigator, set_app_config,
)
from contactsync.services import CategoriesService, ContactsService, HttpClient
from contactsync.sync import ListSyncController
from contactsync.widgets import ContactFormWidget, ContactListWidget, LoaderOverlay, ToastContainer

logger = logging.getLogger(__name__)

NEW_PATH = "/new"
EDIT_PREFIX = "/edit/"


@dataclass
class _MountedPage:
    widget: QWidget
    guard: LifecycleGuard
    disposers: List[Callable[[], None]] = field(default_factory=list)

    def unmount(self) -> None:
        self.guard.teardown()
        for dispose in self.disposers:
            dispose()
        self.widget.deleteLater()


class MainWindow(QMainWindow):
    """Single-window shell that swaps pages on navigation."""

    def __init__(self, contacts: ContactSource, categories: CategorySource, parent=None):
        super().__init__(parent)
        self.setWindowTitle("MyContacts")
        self._contacts = contacts
        self._categories = categories
        self._page: Optional[_MountedPage] = None
        self.current_path: Optional[str] = None

        central = QWidget(self)
        self._layout = QVBoxLayout(central)
        self.toasts = ToastContainer(parent=central)
        self._layout.addWidget(self.toasts)
        self.setCentralWidget(central)

        register_navigator(self.navigate)

    @property
    def page_widget(self) -> Optional[QWidget]:
        return self._page.widget if self._page else None

    def navigate(self, path: str) -> None:
        logger.info(f"Navigating to {path}")
        if self._page is not None:
            self._layout.removeWidget(self._page.widget)
            self._page.unmount()
            self._page = None

        if path == NEW_PATH:
            page = self._build_new_page()
        elif path.startswith(EDIT_PREFIX):
            page = self._build_edit_page(path[len(EDIT_PREFIX):])
        else:
            if path != HOME_PATH:
                logger.warning(f"Unknown route {path!r}, showing the contact list")
                path = HOME_PATH
            page = self._build_home_page()

        self._page = page
        self.current_path = path
        self._layout.insertWidget(0, page.widget)

    def closeEvent(self, event):
        if self._page is not None:
            self._page.unmount()
            self._page = None
        super().closeEvent(event)

    # ========== PAGES ==========

    def _build_home_page(self) -> _MountedPage:
        widget = QWidget()
        guard = LifecycleGuard("home")
        controller = ListSyncController(self._contacts.list_contacts, guard, parent=widget)
        layout = QVBoxLayout(widget)
        new_button = QPushButton("Novo contato", widget)
        new_button.clicked.connect(lambda: self.navigate(NEW_PATH))
        layout.addWidget(new_button)
        list_widget = ContactListWidget(controller, widget)
        list_widget.edit_requested.connect(lambda contact_id: self.navigate(f"{EDIT_PREFIX}{contact_id}"))
        layout.addWidget(list_widget)
        controller.load()
        return _MountedPage(widget, guard, [controller.dispose])

    def _build_new_page(self) -> _MountedPage:
        widget = QWidget()
        guard = LifecycleGuard("new-contact")
        form = ContactFormModel(self._categories, guard, parent=widget)
        page = NewContactController(form.commands, self._contacts, guard, parent=widget)
        layout = QVBoxLayout(widget)
        layout.addWidget(QLabel("Novo contato", widget))
        layout.addWidget(ContactFormWidget(form, "Cadastrar", page.handle_submit, widget))
        form.load_categories()
        return _MountedPage(widget, guard, [form.dispose, page.dispose])

    def _build_edit_page(self, contact_id: str) -> _MountedPage:
        widget = QWidget()
        guard = LifecycleGuard(f"edit-contact-{contact_id}")
        form = ContactFormModel(self._categories, guard, parent=widget)
        page = EditContactController(contact_id, form.commands, self._contacts, guard, parent=widget)
        layout = QVBoxLayout(widget)
        title = QLabel("Carregando...", widget)
        page.contact_name_changed.connect(lambda name: title.setText(f"Editar {name}"))
        layout.addWidget(title)
        loader = LoaderOverlay(widget)
        loader.set_loading(True)
        page.loading_changed.connect(loader.set_loading)
        layout.addWidget(loader)
        layout.addWidget(ContactFormWidget(form, "Salvar alterações", page.handle_submit, widget))
        form.load_categories()
        page.load_contact()
        return _MountedPage(widget, guard, [form.dispose, page.dispose])


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    config = AppConfig.from_env()
    set_app_config(config)

    app = QApplication(argv if argv is not None else sys.argv)
    client = HttpClient(config.api_base_url, config.request_timeout_s)
    window = MainWindow(ContactsService(client), CategoriesService(client))
    window.navigate(HOME_PATH)
    window.show()
    try:
        return app.exec()
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())
