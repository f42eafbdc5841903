"""Contact list page bound to a ListSyncController."""

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout, QLabel, QLineEdit, QListWidget, QListWidgetItem, QPushButton, QVBoxLayout, QWidget,
)

from contactsync.sync import ListSyncController, ListResult, ListStatus, OrderDirection
from contactsync.utils import contact_count_label
from contactsync.widgets.loader import LoaderOverlay

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Ocorreu um erro ao obter os seus contatos!"
RETRY_LABEL = "Tentar novamente"
ORDER_ARROWS = {OrderDirection.ASC: "↑", OrderDirection.DESC: "↓"}


class ContactListWidget(QWidget):
    """Search box, count header, ordering toggle, list, error state with retry."""

    edit_requested = pyqtSignal(str)  # contact id

    def __init__(self, controller: ListSyncController, parent=None):
        super().__init__(parent)
        self.controller = controller

        self.search_edit = QLineEdit(self)
        self.search_edit.setPlaceholderText("Pesquisar contato")
        self.count_label = QLabel(self)
        self.order_button = QPushButton(self)
        self.list_widget = QListWidget(self)
        self.loader = LoaderOverlay(self)

        self.error_panel = QWidget(self)
        error_layout = QHBoxLayout(self.error_panel)
        error_layout.addWidget(QLabel(LOAD_ERROR_MESSAGE, self.error_panel))
        self.retry_button = QPushButton(RETRY_LABEL, self.error_panel)
        error_layout.addWidget(self.retry_button)

        layout = QVBoxLayout(self)
        layout.addWidget(self.search_edit)
        layout.addWidget(self.count_label)
        layout.addWidget(self.order_button)
        layout.addWidget(self.error_panel)
        layout.addWidget(self.list_widget)
        layout.addWidget(self.loader)

        self.search_edit.textChanged.connect(controller.set_search_term)
        self.order_button.clicked.connect(controller.toggle_order_direction)
        self.retry_button.clicked.connect(controller.retry)
        self.list_widget.itemActivated.connect(
            lambda item: self.edit_requested.emit(item.data(Qt.ItemDataRole.UserRole))
        )
        controller.result_changed.connect(self.render_result)
        controller.query_changed.connect(lambda _: self._render_order())

        self._render_order()
        self.render_result(controller.result)

    def render_result(self, result: ListResult) -> None:
        self.loader.set_loading(result.status is ListStatus.LOADING)
        self.error_panel.setVisible(result.status is ListStatus.ERROR)

        visible = self.controller.visible_items
        self.count_label.setText(contact_count_label(len(visible)))
        self.count_label.setVisible(result.status is not ListStatus.ERROR)
        self.order_button.setVisible(bool(visible))

        self.list_widget.clear()
        for contact in visible:
            text = contact.name
            if contact.category_name:
                text += f"  [{contact.category_name}]"
            details = " · ".join(part for part in (contact.email, contact.phone) if part)
            if details:
                text += f"\n{details}"
            item = QListWidgetItem(text, self.list_widget)
            item.setData(Qt.ItemDataRole.UserRole, contact.id)

    def _render_order(self) -> None:
        direction = self.controller.query.order_direction
        self.order_button.setText(f"Nome {ORDER_ARROWS[direction]}")
