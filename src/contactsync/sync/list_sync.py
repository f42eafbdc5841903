"""
Remote-backed list with ordering, local search and retry.

ListSyncController owns the loading/success/error lifecycle of the contact
list. Ordering changes go to the server; the search term is applied locally
over the fetched items on every read.

Settlement rules:
- load() publishes LOADING synchronously, before the fetch starts
- only the most recently issued fetch may publish its outcome
- nothing is published once the owning view's LifecycleGuard is torn down
- failures are never retried automatically; retry() is a user action
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple, Union

from PyQt6.QtCore import QObject, pyqtSignal

from contactsync.core import LifecycleGuard, BackgroundTaskManager
from contactsync.errors import DecodeError
from contactsync.models import Contact
from contactsync.protocols import get_app_config
from contactsync.services.search_service import SearchService

logger = logging.getLogger(__name__)


class OrderDirection(Enum):
    """Server-side ordering of the list by name."""
    ASC = "asc"
    DESC = "desc"

    @property
    def toggled(self) -> 'OrderDirection':
        return OrderDirection.DESC if self is OrderDirection.ASC else OrderDirection.ASC


class ListStatus(Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ListQuery:
    """Query parameters changed only by explicit user action."""
    order_direction: OrderDirection = OrderDirection.ASC
    search_term: str = ""


@dataclass(frozen=True)
class ListResult:
    """Status-tagged list state. items is empty unless status is SUCCESS."""
    status: ListStatus
    items: Tuple[Contact, ...] = ()
    error: Optional[Exception] = field(default=None, compare=False)

    @classmethod
    def loading(cls) -> 'ListResult':
        return cls(ListStatus.LOADING)

    @classmethod
    def success(cls, items: Sequence[Contact]) -> 'ListResult':
        return cls(ListStatus.SUCCESS, tuple(items))

    @classmethod
    def failure(cls, error: Exception) -> 'ListResult':
        return cls(ListStatus.ERROR, error=error)


ContactFetch = Callable[[str], Sequence[Contact]]


class ListSyncController(QObject):
    """
    Orchestrates a remote list fetch against mutable query parameters.

    Usage:
        guard = LifecycleGuard("home").bind(home_widget)
        controller = ListSyncController(service.list_contacts, guard)
        controller.result_changed.connect(home_widget.render_result)
        controller.load()

        # Header button
        controller.toggle_order_direction()
        # Search box
        controller.set_search_term(text)
        # Error state button
        controller.retry()
    """

    result_changed = pyqtSignal(object)   # ListResult
    query_changed = pyqtSignal(object)    # ListQuery

    def __init__(
        self,
        fetch: ContactFetch,
        guard: LifecycleGuard,
        query: Optional[ListQuery] = None,
        search_service: Optional[SearchService[Contact]] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._fetch = fetch
        self._guard = guard
        self._query = query or ListQuery()
        self._search = search_service or SearchService(
            lambda contact: contact.name, get_app_config().min_search_chars
        )
        self._tasks = BackgroundTaskManager("contact-list")
        self._result = ListResult.loading()

    # ========== STATE ==========

    @property
    def query(self) -> ListQuery:
        return self._query

    @property
    def result(self) -> ListResult:
        return self._result

    @property
    def status(self) -> ListStatus:
        return self._result.status

    @property
    def items(self) -> Tuple[Contact, ...]:
        """Fetched items, unfiltered."""
        return self._result.items

    @property
    def visible_items(self) -> Tuple[Contact, ...]:
        """Fetched items filtered by the current search term."""
        return self._search.filter(self._result.items, self._query.search_term)

    @property
    def tasks(self) -> BackgroundTaskManager:
        return self._tasks

    # ========== OPERATIONS ==========

    def load(self) -> None:
        """Fetch the list for the current ordering."""
        self._set_result(ListResult.loading())
        direction = self._query.order_direction
        logger.debug(f"Loading contacts ordered {direction.value}")
        self._tasks.run(
            target=self._fetch,
            args=(direction.value,),
            on_success=self._guard.guarded(self._on_fetched),
            on_error=self._guard.guarded(self._on_failed),
        )

    def retry(self) -> bool:
        """Reload after a failure. Does nothing unless status is ERROR.

        Returns:
            True if a new load was started
        """
        if self._result.status is not ListStatus.ERROR:
            logger.debug(f"Ignoring retry while {self._result.status.value}")
            return False
        self.load()
        return True

    def set_order_direction(self, direction: Union[OrderDirection, str]) -> None:
        """Change the server-side ordering and reload.

        Raises:
            ValueError: If direction is not "asc" or "desc"
        """
        direction = OrderDirection(direction)
        if direction is self._query.order_direction:
            return
        self._set_query(replace(self._query, order_direction=direction))
        self.load()

    def toggle_order_direction(self) -> None:
        self.set_order_direction(self._query.order_direction.toggled)

    def set_search_term(self, term: str) -> None:
        """Change the local filter. Never triggers a fetch."""
        if term == self._query.search_term:
            return
        self._set_query(replace(self._query, search_term=term))
        # Observers re-read visible_items from the unchanged result
        self.result_changed.emit(self._result)

    def dispose(self) -> None:
        """Drop pending settlements and wait briefly for running fetches."""
        self._tasks.cleanup()

    # ========== SETTLEMENT ==========

    def _on_fetched(self, items) -> None:
        contacts = tuple(items or ())
        if not all(isinstance(contact, Contact) for contact in contacts):
            self._on_failed(DecodeError("Contact list contained non-contact records"))
            return
        logger.debug(f"Loaded {len(contacts)} contacts")
        self._set_result(ListResult.success(contacts))

    def _on_failed(self, error: Exception) -> None:
        logger.warning(f"Contact list fetch failed: {error}")
        self._set_result(ListResult.failure(error))

    def _set_result(self, result: ListResult) -> None:
        self._result = result
        self.result_changed.emit(result)

    def _set_query(self, query: ListQuery) -> None:
        self._query = query
        self.query_changed.emit(query)
