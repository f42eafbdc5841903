"""pytest configuration and fixtures for contactsync tests."""

import os
import threading
import time
from typing import Dict, List, Optional

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QCoreApplication
from PyQt6.QtWidgets import QApplication

from contactsync.errors import APIError
from contactsync.models import Category, Contact, ContactPayload
from contactsync.protocols import app_config, navigation
from contactsync.services.toast_service import ToastService


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_globals():
    """Each test starts with default config, no navigator and a fresh toast bus."""
    app_config._app_config = None
    navigation._navigator = None
    ToastService._instance = None
    yield
    app_config._app_config = None
    navigation._navigator = None
    ToastService._instance = None


@pytest.fixture
def wait_until(qapp):
    """Spin the event loop until predicate() holds or the timeout expires."""
    def _wait(predicate, timeout_s: float = 3.0) -> bool:
        deadline = time.monotonic() + timeout_s
        while time.monotonic() < deadline:
            QCoreApplication.processEvents()
            if predicate():
                return True
            time.sleep(0.005)
        QCoreApplication.processEvents()
        return predicate()
    return _wait


class FakeContacts:
    """In-memory ContactSource. Set gate to hold calls, fail_with to raise."""

    def __init__(self, contacts=()):
        self.contacts: Dict[str, Contact] = {c.id: c for c in contacts}
        self.fail_with: Optional[Exception] = None
        self.gate: Optional[threading.Event] = None
        self.calls: List[tuple] = []

    def _enter(self, *call):
        self.calls.append(call)
        if self.gate is not None:
            self.gate.wait(5)
        if self.fail_with is not None:
            raise self.fail_with

    def list_contacts(self, order_by: str = "asc"):
        self._enter("list", order_by)
        return sorted(self.contacts.values(), key=lambda c: c.name, reverse=order_by == "desc")

    def get_contact_by_id(self, contact_id: str) -> Contact:
        self._enter("get", contact_id)
        if contact_id not in self.contacts:
            raise APIError(404, {"error": "Contact not found"})
        return self.contacts[contact_id]

    def create_contact(self, payload: ContactPayload) -> Contact:
        self._enter("create", payload)
        contact = Contact(id=str(len(self.contacts) + 1), name=payload.name, email=payload.email,
                          phone=payload.phone, category_id=payload.category_id)
        self.contacts[contact.id] = contact
        return contact

    def update_contact(self, contact_id: str, payload: ContactPayload) -> Contact:
        self._enter("update", contact_id, payload)
        contact = Contact(id=contact_id, name=payload.name, email=payload.email,
                          phone=payload.phone, category_id=payload.category_id)
        self.contacts[contact_id] = contact
        return contact


class FakeCategories:
    def __init__(self, categories=()):
        self.categories = list(categories)
        self.fail_with: Optional[Exception] = None
        self.gate: Optional[threading.Event] = None

    def list_categories(self):
        if self.gate is not None:
            self.gate.wait(5)
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.categories)


@pytest.fixture
def ana():
    return Contact(id="1", name="Ana", email="ana@example.com", phone="11999998888",
                   category_id="10", category_name="Instagram")


@pytest.fixture
def contacts(ana):
    return FakeContacts([
        ana,
        Contact(id="2", name="Bob"),
        Contact(id="3", name="Anderson"),
    ])


@pytest.fixture
def categories():
    return FakeCategories([Category(id="10", name="Instagram"), Category(id="11", name="LinkedIn")])


@pytest.fixture
def toasts():
    """Collects (type, text) pairs instead of publishing on the bus."""
    sent = []

    def notify(type, text):
        sent.append((type, text))
    notify.sent = sent
    return notify
