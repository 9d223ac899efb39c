"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactdesk.application.dto import ContactDraft
from contactdesk.domain import Contact


class ContactStore(Protocol):
    """Owns the authoritative contact collection. Operations may raise StoreError."""

    async def create(self, draft: ContactDraft) -> Contact:
        """Store a new contact built from the draft; assigns id and created_at."""
        ...

    async def list(self) -> list[Contact]:
        """Return all contacts, newest first."""
        ...

    async def delete_by_id(self, contact_id: str) -> bool:
        """Remove every contact with this id. Deleting an unknown id is not an error."""
        ...
