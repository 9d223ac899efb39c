"""Form state: draft values plus per-field error messages."""

from contactdesk.application.dto import FIELDS, REQUIRED_FIELDS, ContactDraft, ErrorMap
from contactdesk.application.validation import (
    strip_blank,
    validate_email,
    validate_field,
    validate_form,
    validate_phone,
)


class FormState:
    """Holds the draft and the error map. Validates on blur and on submit.

    The error map is replaced, never mutated, so a map handed out earlier
    stays as it was.
    """

    def __init__(
        self,
        draft: ContactDraft | None = None,
        errors: ErrorMap | None = None,
    ) -> None:
        self._draft = draft or ContactDraft()
        self._errors: dict[str, str] = dict(errors or {})

    @property
    def draft(self) -> ContactDraft:
        return self._draft

    @property
    def errors(self) -> ErrorMap:
        return dict(self._errors)

    def error_for(self, field_name: str) -> str | None:
        """Message to show under a field, or None. Cleared ("") messages show nothing."""
        return self._errors.get(field_name) or None

    def on_field_change(self, field_name: str, value: str) -> None:
        """Update the draft. A recorded message for this field is blanked, not re-validated."""
        self._draft = self._draft.with_field(field_name, value)
        if self._errors.get(field_name):
            self._errors = {**self._errors, field_name: ""}

    def on_field_blur(self, field_name: str) -> None:
        """Re-run the rule for one field; other fields' errors are left alone."""
        if field_name not in FIELDS:
            raise ValueError(f"Unknown contact field: {field_name!r}")
        if field_name not in REQUIRED_FIELDS:
            return
        message = validate_field(field_name, self._draft)
        errors = dict(self._errors)
        if message is None:
            errors.pop(field_name, None)
        else:
            errors[field_name] = message
        self._errors = errors

    def validate(self) -> ErrorMap:
        """Full validation for submit. Replaces the error map and returns it."""
        self._errors = dict(validate_form(self._draft))
        return dict(self._errors)

    def is_submittable(self) -> bool:
        # Both the direct field checks and an empty error map are required.
        draft = self._draft
        return (
            bool(strip_blank(draft.name))
            and validate_email(draft.email)
            and validate_phone(draft.phone)
            and len(self._errors) == 0
        )

    def reset(self) -> None:
        self._draft = ContactDraft()
        self._errors = {}
