"""Qt widgets bound to a ContactFormModel."""

import logging
from typing import Dict

from PyQt6.QtWidgets import (
    QComboBox, QFormLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget,
)

from contactsync.forms import ContactFormModel
from contactsync.forms.contact_form import NAME_FIELD, EMAIL_FIELD, SubmitHandler
from contactsync.widgets.signal_blocking import block_signals

logger = logging.getLogger(__name__)

PHONE_MAX_LENGTH = 16
NO_CATEGORY_LABEL = "Sem categoria"
ERROR_STYLE = "color: #FC5050;"


class ContactFormWidget(QWidget):
    """
    Name/email/phone/category inputs with inline field errors.

    The widget keeps no state of its own: every edit goes to the model and
    the widgets are re-synced whenever the model changes.
    """

    def __init__(self, model: ContactFormModel, button_label: str, on_submit: SubmitHandler, parent=None):
        super().__init__(parent)
        self.model = model
        self._on_submit = on_submit

        self.name_edit = QLineEdit(self)
        self.name_edit.setPlaceholderText("Nome *")
        self.email_edit = QLineEdit(self)
        self.email_edit.setPlaceholderText("E-mail")
        self.phone_edit = QLineEdit(self)
        self.phone_edit.setPlaceholderText("Telefone")
        self.phone_edit.setMaxLength(PHONE_MAX_LENGTH)
        self.category_combo = QComboBox(self)
        self.submit_button = QPushButton(button_label, self)

        self._error_labels: Dict[str, QLabel] = {
            NAME_FIELD: QLabel(self),
            EMAIL_FIELD: QLabel(self),
        }
        for label in self._error_labels.values():
            label.setStyleSheet(ERROR_STYLE)

        layout = QVBoxLayout(self)
        fields = QFormLayout()
        fields.addRow(self.name_edit)
        fields.addRow(self._error_labels[NAME_FIELD])
        fields.addRow(self.email_edit)
        fields.addRow(self._error_labels[EMAIL_FIELD])
        fields.addRow(self.phone_edit)
        fields.addRow(self.category_combo)
        layout.addLayout(fields)
        layout.addWidget(self.submit_button)

        self.name_edit.textEdited.connect(model.set_name)
        self.email_edit.textEdited.connect(model.set_email)
        self.phone_edit.textEdited.connect(model.set_phone)
        self.category_combo.currentIndexChanged.connect(self._on_category_selected)
        self.submit_button.clicked.connect(self._submit)

        model.changed.connect(self._sync_from_model)
        model.categories_changed.connect(self._rebuild_categories)
        model.submitting_changed.connect(lambda _: self._sync_from_model())

        self._rebuild_categories()
        self._sync_from_model()

    def error_text(self, field: str) -> str:
        return self._error_labels[field].text()

    def _submit(self) -> None:
        if not self.model.submit(self._on_submit):
            logger.debug("Submit ignored: form invalid or already submitting")

    def _on_category_selected(self, index: int) -> None:
        self.model.set_category_id(self.category_combo.itemData(index) or "")

    def _rebuild_categories(self) -> None:
        with block_signals(self.category_combo):
            self.category_combo.clear()
            self.category_combo.addItem(NO_CATEGORY_LABEL, "")
            for category in self.model.categories:
                self.category_combo.addItem(category.name, category.id)
            self._select_category(self.model.category_id)
        self._sync_enabled()

    def _select_category(self, category_id: str) -> None:
        index = self.category_combo.findData(category_id)
        self.category_combo.setCurrentIndex(index if index >= 0 else 0)

    def _sync_from_model(self) -> None:
        model = self.model
        with block_signals(self.name_edit, self.email_edit, self.phone_edit, self.category_combo):
            for edit, value in (
                (self.name_edit, model.name),
                (self.email_edit, model.email),
                (self.phone_edit, model.phone),
            ):
                if edit.text() != value:
                    edit.setText(value)
            self._select_category(model.category_id)

        for field, label in self._error_labels.items():
            message = model.errors.message_for(field) or ""
            label.setText(message)
            label.setVisible(bool(message))
        self._sync_enabled()

    def _sync_enabled(self) -> None:
        model = self.model
        for edit in (self.name_edit, self.email_edit, self.phone_edit):
            edit.setEnabled(not model.is_submitting)
        self.category_combo.setEnabled(not (model.is_loading_categories or model.is_submitting))
        self.submit_button.setEnabled(model.is_form_valid and not model.is_submitting)
