"""Field rules for the contact form. Pure functions; errors are returned, not raised."""

import re

from contactdesk.application.dto import REQUIRED_FIELDS, ContactDraft, ErrorMap

# Whitespace as browsers define it. Python's \s also matches \x1c-\x1f and \x85; those are not blank here.
_WHITESPACE_CODEPOINTS = (
    0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
    *range(0x2000, 0x200B),
    0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
)
_WHITESPACE_CHARS = "".join(chr(c) for c in _WHITESPACE_CODEPOINTS)
_WS = re.escape(_WHITESPACE_CHARS)

# Single-level domain check, not RFC compliant.
_EMAIL_RE = re.compile("^[^" + _WS + "@]+@[^" + _WS + "@]+\\.[^" + _WS + "@]+$")
_PHONE_RE = re.compile("^[0-9" + _WS + r"\-+()]{10,}$")

_REQUIRED_MESSAGES = {
    "name": "Name is required",
    "email": "Email is required",
    "phone": "Phone number is required",
}
NAME_TOO_SHORT = "Name must be at least 2 characters"
INVALID_EMAIL = "Please enter a valid email address"
INVALID_PHONE = "Please enter a valid phone number (at least 10 digits)"

NAME_MIN_LENGTH = 2


def strip_blank(value: str) -> str:
    """Trim the same whitespace set the patterns use."""
    return (value or "").strip(_WHITESPACE_CHARS)


def validate_email(value: str) -> bool:
    return _EMAIL_RE.fullmatch(value or "") is not None


def validate_phone(value: str) -> bool:
    """Digits, spaces, hyphens, plus and parentheses only, at least 10 characters.
    The value is not trimmed, so surrounding spaces count toward the length.
    """
    return _PHONE_RE.fullmatch(value or "") is not None


def validate_field(field_name: str, draft: ContactDraft) -> str | None:
    """Return the error message for one field, or None if it passes.
    The message field and unknown names have no rule.
    """
    if field_name not in REQUIRED_FIELDS:
        return None
    value = draft.get(field_name)
    if not strip_blank(value):
        return _REQUIRED_MESSAGES[field_name]
    if field_name == "name" and len(strip_blank(value)) < NAME_MIN_LENGTH:
        return NAME_TOO_SHORT
    if field_name == "email" and not validate_email(value):
        return INVALID_EMAIL
    if field_name == "phone" and not validate_phone(value):
        return INVALID_PHONE
    return None


def validate_form(draft: ContactDraft) -> ErrorMap:
    """Return a fresh error map for the required fields. Empty iff submittable."""
    errors = {}
    for field_name in REQUIRED_FIELDS:
        message = validate_field(field_name, draft)
        if message is not None:
            errors[field_name] = message
    return errors
