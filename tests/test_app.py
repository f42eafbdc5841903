"""Navigation tests for the main window."""

import pytest

from contactsync.app import MainWindow
from contactsync.pages import CONTACT_NOT_FOUND_MESSAGE
from contactsync.protocols import get_navigator
from contactsync.services import ToastService, ToastType
from contactsync.widgets import ContactFormWidget, ContactListWidget


@pytest.fixture
def window(qapp, contacts, categories):
    window = MainWindow(contacts, categories)
    yield window
    window.close()
    window.deleteLater()


def test_window_registers_itself_as_navigator(window):
    assert get_navigator() == window.navigate


def test_home_shows_contact_list(window, wait_until):
    window.navigate("/")

    assert window.current_path == "/"
    list_widget = window.page_widget.findChild(ContactListWidget)
    assert list_widget is not None
    assert wait_until(lambda: list_widget.list_widget.count() == 3)


def test_unknown_route_falls_back_to_home(window):
    window.navigate("/nowhere")

    assert window.current_path == "/"


def test_edit_route_fills_form(window, wait_until):
    window.navigate("/edit/1")

    form_widget = window.page_widget.findChild(ContactFormWidget)
    assert wait_until(lambda: form_widget.name_edit.text() == "Ana")
    assert window.current_path == "/edit/1"


def test_missing_contact_returns_home_with_toast(window, wait_until):
    sent = []
    ToastService.instance().toast_added.connect(sent.append)

    window.navigate("/edit/404")

    assert wait_until(lambda: window.current_path == "/")
    assert [(m.type, m.text) for m in sent] == [(ToastType.DANGER, CONTACT_NOT_FOUND_MESSAGE)]


def test_navigation_tears_down_previous_page(window):
    window.navigate("/edit/1")
    edit_page = window.page_widget
    window.navigate("/new")

    assert window.page_widget is not edit_page
    assert window.current_path == "/new"
    assert window.page_widget.findChild(ContactFormWidget) is not None
