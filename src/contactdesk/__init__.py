"""
Contactdesk core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: validation, form state, list view, ContactFormController, ports (ContactStore), DTOs.
- infrastructure: adapters (InMemoryContactStore).
"""

from contactdesk.application import (
    Busy,
    ContactDraft,
    ContactFormController,
    ContactStore,
    Failed,
    FormState,
    ListStatus,
    ListView,
    Rejected,
    StoreError,
    Submitted,
    validate_email,
    validate_form,
    validate_phone,
)
from contactdesk.domain import Contact
from contactdesk.infrastructure import InMemoryContactStore, default_store

__all__ = [
    "Busy",
    "Contact",
    "ContactDraft",
    "ContactFormController",
    "ContactStore",
    "Failed",
    "FormState",
    "InMemoryContactStore",
    "ListStatus",
    "ListView",
    "Rejected",
    "StoreError",
    "Submitted",
    "default_store",
    "validate_email",
    "validate_form",
    "validate_phone",
]
