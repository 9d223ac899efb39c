"""Application DTOs: form draft and submit outcomes."""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from contactdesk.domain import Contact

FIELDS = ("name", "email", "phone", "message")
REQUIRED_FIELDS = ("name", "email", "phone")

# field name -> message. A key with "" means cleared while typing, not re-validated yet.
ErrorMap = Mapping[str, str]


@dataclass(frozen=True)
class ContactDraft:
    """Unsaved form values. Not validated."""

    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""

    def with_field(self, field_name: str, value: str) -> "ContactDraft":
        if field_name not in FIELDS:
            raise ValueError(f"Unknown contact field: {field_name!r}")
        return replace(self, **{field_name: value})

    def get(self, field_name: str) -> str:
        if field_name not in FIELDS:
            raise ValueError(f"Unknown contact field: {field_name!r}")
        return getattr(self, field_name)


@dataclass(frozen=True)
class Submitted:
    contact: Contact


@dataclass(frozen=True)
class Rejected:
    errors: ErrorMap = field(default_factory=dict)


@dataclass(frozen=True)
class Busy:
    """A submission is already outstanding."""


@dataclass(frozen=True)
class Failed:
    reason: str
