"""
Qt widgets for the contact manager.

Thin presentation layer over the forms, sync and animation tiers.
"""

from .loader import LoaderOverlay
from .toast_container import ToastContainer, ToastWidget
from .contact_form_widget import ContactFormWidget
from .contact_list_widget import ContactListWidget
from .signal_blocking import block_signals

__all__ = [
    "LoaderOverlay",
    "ToastContainer",
    "ToastWidget",
    "ContactFormWidget",
    "ContactListWidget",
    "block_signals",
]
