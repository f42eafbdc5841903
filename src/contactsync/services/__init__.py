"""
Service layer.

Remote collaborators (HTTP client, contacts, categories), client-side
search and the toast notification bus.
"""

from .http_client import HttpClient
from .contact_mapper import ContactMapper
from .contacts_service import ContactsService
from .categories_service import CategoriesService
from .search_service import SearchService
from .toast_service import ToastService, ToastType, ToastMessage, toast

__all__ = [
    "HttpClient",
    "ContactMapper",
    "ContactsService",
    "CategoriesService",
    "SearchService",
    "ToastService",
    "ToastType",
    "ToastMessage",
    "toast",
]
