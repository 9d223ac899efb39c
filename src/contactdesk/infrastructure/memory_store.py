"""In-memory implementation of ContactStore (no DB). Mock of the REST backend with fixed latency."""

import asyncio
import logging
import time
from collections import Counter
from collections.abc import Callable
from datetime import datetime, timezone

from contactdesk.application.dto import ContactDraft
from contactdesk.domain import Contact

logger = logging.getLogger(__name__)

CREATE_DELAY = 0.5
LIST_DELAY = 0.3
DELETE_DELAY = 0.3


class InMemoryContactStore:
    """Stores contacts in memory. Order preserved by insertion; list() is newest first.
    Ids come from the creation time in milliseconds, bumped when two creates share one.
    """

    def __init__(
        self,
        *,
        create_delay: float = CREATE_DELAY,
        list_delay: float = LIST_DELAY,
        delete_delay: float = DELETE_DELAY,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._contacts: list[Contact] = []
        self._create_delay = create_delay
        self._list_delay = list_delay
        self._delete_delay = delete_delay
        self._clock = clock or time.time
        self._last_id = 0
        self.calls: Counter[str] = Counter()

    @classmethod
    def without_latency(cls, **kwargs) -> "InMemoryContactStore":
        return cls(create_delay=0, list_delay=0, delete_delay=0, **kwargs)

    async def _sleep(self, delay: float) -> None:
        if delay > 0:
            await asyncio.sleep(delay)

    def _next_id(self, now: float) -> str:
        candidate = int(now * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    async def create(self, draft: ContactDraft) -> Contact:
        self.calls["create"] += 1
        await self._sleep(self._create_delay)
        now = self._clock()
        contact = Contact(
            id=self._next_id(now),
            name=draft.name,
            email=draft.email,
            phone=draft.phone,
            message=draft.message or None,
            created_at=datetime.fromtimestamp(now, tz=timezone.utc),
        )
        self._contacts.append(contact)
        logger.debug("Created contact %s", contact.id)
        return contact

    async def list(self) -> list[Contact]:
        self.calls["list"] += 1
        await self._sleep(self._list_delay)
        return list(reversed(self._contacts))

    async def delete_by_id(self, contact_id: str) -> bool:
        self.calls["delete"] += 1
        await self._sleep(self._delete_delay)
        before = len(self._contacts)
        self._contacts = [c for c in self._contacts if c.id != contact_id]
        logger.debug("Deleted %d contact(s) with id %s", before - len(self._contacts), contact_id)
        return True

    def __len__(self) -> int:
        return len(self._contacts)


_default_store: InMemoryContactStore | None = None


def default_store() -> InMemoryContactStore:
    """Process-wide mock store. Components should still receive the store as a dependency."""
    global _default_store
    if _default_store is None:
        _default_store = InMemoryContactStore()
    return _default_store
