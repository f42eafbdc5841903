"""Widget-level tests: form binding, contact list, toasts and loader."""

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtTest import QTest

from contactsync.animation import ExitAnimationConfig
from contactsync.core import LifecycleGuard
from contactsync.errors import NetworkError
from contactsync.forms import ContactFormModel, NAME_REQUIRED_MESSAGE, INVALID_EMAIL_MESSAGE
from contactsync.services import ToastService, ToastType, toast
from contactsync.sync import ListStatus, ListSyncController
from contactsync.widgets import ContactFormWidget, ContactListWidget, LoaderOverlay, ToastContainer
from contactsync.widgets.signal_blocking import block_signals

FAST_EXIT = ExitAnimationConfig(duration_ms=10)


class TestContactFormWidget:

    @pytest.fixture
    def submitted(self):
        return []

    @pytest.fixture
    def form(self, qapp, categories):
        form = ContactFormModel(categories)
        yield form
        form.dispose()

    @pytest.fixture
    def widget(self, form, submitted, wait_until):
        widget = ContactFormWidget(form, "Cadastrar", lambda payload: submitted.append(payload))
        form.load_categories()
        assert wait_until(lambda: not form.is_loading_categories)
        yield widget
        widget.deleteLater()

    def test_categories_fill_the_selector(self, widget):
        combo = widget.category_combo

        assert [combo.itemText(i) for i in range(combo.count())] == ["Sem categoria", "Instagram", "LinkedIn"]
        assert combo.isEnabled()

    def test_typing_updates_model_and_errors(self, widget, form):
        assert not widget.submit_button.isEnabled()

        QTest.keyClicks(widget.name_edit, "Ana")
        assert form.name == "Ana"
        assert widget.submit_button.isEnabled()

        for _ in range(3):
            QTest.keyClick(widget.name_edit, Qt.Key.Key_Backspace)
        assert form.name == ""
        assert widget.error_text("name") == NAME_REQUIRED_MESSAGE
        assert not widget.submit_button.isEnabled()

        QTest.keyClicks(widget.email_edit, "ana@")
        assert widget.error_text("email") == INVALID_EMAIL_MESSAGE

    def test_phone_is_formatted_while_typing(self, widget, form):
        QTest.keyClicks(widget.phone_edit, "11999998888")

        assert form.phone == "(11) 99999-8888"
        assert widget.phone_edit.text() == "(11) 99999-8888"

    def test_set_fields_values_reaches_the_inputs(self, widget, form, ana):
        form.commands.set_fields_values(ana)

        assert widget.name_edit.text() == "Ana"
        assert widget.email_edit.text() == "ana@example.com"
        assert widget.phone_edit.text() == "(11) 99999-8888"
        assert widget.category_combo.currentData() == "10"

    def test_submit_button_sends_payload(self, widget, form, submitted):
        QTest.keyClicks(widget.name_edit, "Ana")
        widget.category_combo.setCurrentIndex(2)

        widget.submit_button.click()

        assert len(submitted) == 1
        assert submitted[0].name == "Ana"
        assert submitted[0].category_id == "11"
        assert not form.is_submitting

    def test_reset_fields_clears_inputs_and_errors(self, widget, form):
        QTest.keyClicks(widget.email_edit, "bad")
        form.commands.reset_fields()

        assert widget.email_edit.text() == ""
        assert widget.error_text("email") == ""
        assert widget.category_combo.currentIndex() == 0


class TestContactListWidget:

    @pytest.fixture
    def controller(self, qapp, contacts):
        controller = ListSyncController(contacts.list_contacts, LifecycleGuard("home"))
        yield controller
        controller.dispose()

    @pytest.fixture
    def widget(self, controller):
        widget = ContactListWidget(controller)
        yield widget
        widget.deleteLater()

    def test_renders_loaded_contacts(self, widget, controller, wait_until):
        controller.load()
        assert widget.loader.is_loading

        assert wait_until(lambda: controller.status is ListStatus.SUCCESS)
        assert not widget.loader.is_loading
        assert widget.count_label.text() == "3 contatos"
        assert widget.list_widget.count() == 3
        assert widget.list_widget.item(0).data(Qt.ItemDataRole.UserRole) == "1"
        assert widget.error_panel.isHidden()

    def test_search_filters_without_fetching(self, widget, controller, contacts, wait_until):
        controller.load()
        assert wait_until(lambda: controller.status is ListStatus.SUCCESS)
        calls_before = list(contacts.calls)

        widget.search_edit.setText("bob")

        assert widget.count_label.text() == "1 contato"
        assert widget.list_widget.count() == 1
        assert contacts.calls == calls_before

    def test_order_button_refetches(self, widget, controller, contacts, wait_until):
        controller.load()
        assert wait_until(lambda: controller.status is ListStatus.SUCCESS)
        assert widget.order_button.text() == "Nome ↑"

        widget.order_button.click()

        assert widget.order_button.text() == "Nome ↓"
        assert wait_until(lambda: controller.status is ListStatus.SUCCESS)
        assert ("list", "desc") in contacts.calls
        assert widget.list_widget.item(0).data(Qt.ItemDataRole.UserRole) == "2"

    def test_error_panel_and_retry(self, widget, controller, contacts, wait_until):
        contacts.fail_with = NetworkError("offline")
        controller.load()
        assert wait_until(lambda: controller.status is ListStatus.ERROR)
        assert not widget.error_panel.isHidden()
        assert widget.list_widget.count() == 0

        contacts.fail_with = None
        widget.retry_button.click()

        assert wait_until(lambda: controller.status is ListStatus.SUCCESS)
        assert widget.error_panel.isHidden()
        assert widget.list_widget.count() == 3

    def test_activating_item_requests_edit(self, widget, controller, wait_until):
        requested = []
        widget.edit_requested.connect(requested.append)
        controller.load()
        assert wait_until(lambda: controller.status is ListStatus.SUCCESS)

        widget.list_widget.itemActivated.emit(widget.list_widget.item(2))

        assert requested == ["2"]


class TestToastContainer:

    @pytest.fixture
    def container(self, qapp):
        container = ToastContainer(config=FAST_EXIT)
        yield container
        container.close()
        container.deleteLater()

    def test_toast_appears_and_leaves_on_dismiss(self, container, wait_until):
        message = toast(ToastType.SUCCESS, "Salvo", duration_ms=0)

        assert container.toast_ids == (message.id,)
        toast_widget = container.toast_widget(message.id)
        toast_widget.dismiss()

        assert toast_widget.is_leaving
        # Still rendered while the fade-out runs
        assert container.toast_ids == (message.id,)
        assert wait_until(lambda: container.toast_ids == ())

    def test_toast_leaves_after_duration(self, container, wait_until):
        toast(ToastType.DANGER, "Erro", duration_ms=20)

        assert len(container.toast_ids) == 1
        assert wait_until(lambda: container.toast_ids == ())

    def test_toasts_stack_in_order(self, container):
        first = toast(ToastType.DEFAULT, "um", duration_ms=0)
        second = toast(ToastType.DEFAULT, "dois", duration_ms=0)

        assert container.toast_ids == (first.id, second.id)

    def test_closed_container_stops_listening(self, qapp):
        container = ToastContainer(config=FAST_EXIT)
        container.close()

        toast(ToastType.DEFAULT, "ignored", duration_ms=0)

        assert container.toast_ids == ()
        assert ToastService.instance().receivers(ToastService.instance().toast_added) == 0
        container.deleteLater()


class TestLoaderOverlay:

    def test_fades_out_before_hiding(self, qapp, wait_until):
        loader = LoaderOverlay(config=FAST_EXIT)
        loader.set_loading(True)
        assert loader.is_rendered

        loader.set_loading(False)
        assert not loader.is_loading
        assert loader.is_rendered

        assert wait_until(lambda: not loader.is_rendered)
        loader.deleteLater()

    def test_reshown_during_fade_stays_rendered(self, qapp, wait_until):
        loader = LoaderOverlay(config=ExitAnimationConfig(duration_ms=200))
        loader.set_loading(True)
        loader.set_loading(False)
        loader.set_loading(True)

        QTest.qWait(300)
        assert loader.is_rendered
        assert loader.is_loading
        loader.deleteLater()


def test_block_signals_restores_previous_state(qapp):
    from PyQt6.QtWidgets import QLineEdit

    edit = QLineEdit()
    edit.blockSignals(True)
    with block_signals(edit):
        assert edit.signalsBlocked()
    assert edit.signalsBlocked()

    edit.blockSignals(False)
    with block_signals(edit):
        assert edit.signalsBlocked()
    assert not edit.signalsBlocked()
