"""Domain entities: Contact."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Contact:
    """
    One address-book entry, as stored by a contact store.
    A Contact is immutable once created; it can only be deleted.
    """

    id: str
    name: str
    email: str
    phone: str
    message: str | None = None
    created_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        if not self.id or not str(self.id).strip():
            raise ValueError("Contact id must be non-empty.")
        if self.message == "":
            object.__setattr__(self, "message", None)

    def to_dict(self) -> dict:
        """Wire shape: created_at as ISO 8601, message omitted when absent."""
        out = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
        }
        if self.message is not None:
            out["message"] = self.message
        out["created_at"] = self.created_at.isoformat()
        return out
