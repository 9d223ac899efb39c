"""Application layer: validation, form and list state, controller, ports, DTOs. Depends only on domain."""

from contactdesk.application.contact_form import ContactFormController
from contactdesk.application.dto import (
    Busy,
    ContactDraft,
    ErrorMap,
    Failed,
    Rejected,
    Submitted,
)
from contactdesk.application.errors import StoreError
from contactdesk.application.form_state import FormState
from contactdesk.application.list_view import ListStatus, ListView
from contactdesk.application.ports import ContactStore
from contactdesk.application.validation import (
    validate_email,
    validate_field,
    validate_form,
    validate_phone,
)

__all__ = [
    "Busy",
    "ContactDraft",
    "ContactFormController",
    "ContactStore",
    "ErrorMap",
    "Failed",
    "FormState",
    "ListStatus",
    "ListView",
    "Rejected",
    "StoreError",
    "Submitted",
    "validate_email",
    "validate_field",
    "validate_form",
    "validate_phone",
]
