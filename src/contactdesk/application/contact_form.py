"""Contact form controller: form, list view and store wired together. Single client per instance."""

import asyncio
import logging
from collections.abc import Callable

from contactdesk.application import list_view
from contactdesk.application.dto import Busy, Failed, Rejected, Submitted
from contactdesk.application.form_state import FormState
from contactdesk.application.list_view import ListView
from contactdesk.application.ports import ContactStore

logger = logging.getLogger(__name__)

SUBMIT_FAILED_MESSAGE = "Failed to submit contact. Please try again."
SUCCESS_MESSAGE = "Contact added successfully!"


class ContactFormController:
    """Core flow: edit draft -> validate -> create -> prepend to list. Delete by id. Fetch on mount.

    Store failures of any kind are caught and logged, never raised to the caller.
    Results of store calls that complete after close() are dropped.
    """

    def __init__(
        self,
        store: ContactStore,
        *,
        notify_error: Callable[[str], None] | None = None,
        success_banner_seconds: float = 3.0,
    ) -> None:
        self._store = store
        self._notify_error = notify_error
        self._success_banner_seconds = success_banner_seconds
        self.form = FormState()
        self.view: ListView = list_view.loading()
        self.submitting = False
        self.show_success = False
        self._banner_task: asyncio.Task | None = None
        self._closed = False

    # --- form events ---

    def change(self, field_name: str, value: str) -> None:
        self.form.on_field_change(field_name, value)

    def blur(self, field_name: str) -> None:
        self.form.on_field_blur(field_name)

    # --- store-backed operations ---

    async def mount(self) -> ListView:
        """Fetch the full list once and replace the displayed list."""
        self.view = list_view.loading()
        try:
            contacts = await self._store.list()
        except Exception:
            logger.exception("Error fetching contacts")
            if not self._closed:
                self.view = list_view.load_failed(self.view)
            return self.view
        if self._closed:
            logger.debug("Controller closed; dropping fetched contacts")
            return self.view
        self.view = list_view.loaded(self.view, contacts)
        return self.view

    async def submit(self) -> Submitted | Rejected | Busy | Failed:
        """Validate, then create. The store is not called for an invalid draft."""
        if self.submitting:
            return Busy()
        errors = self.form.validate()
        if errors:
            return Rejected(errors=errors)

        self.submitting = True
        try:
            contact = await self._store.create(self.form.draft)
        except Exception as e:
            logger.exception("Error submitting contact")
            if not self._closed and self._notify_error is not None:
                self._notify_error(SUBMIT_FAILED_MESSAGE)
            return Failed(reason=str(e))
        finally:
            self.submitting = False

        if self._closed:
            logger.debug("Controller closed; dropping created contact %s", contact.id)
            return Submitted(contact=contact)
        self.view = list_view.contact_added(self.view, contact)
        self.form.reset()
        self._show_success_banner()
        return Submitted(contact=contact)

    async def delete(self, contact_id: str) -> bool:
        """Delete by id and drop it from the list. Failures are logged; the list is unchanged."""
        try:
            await self._store.delete_by_id(contact_id)
        except Exception:
            logger.exception("Error deleting contact %s", contact_id)
            return False
        if not self._closed:
            self.view = list_view.contact_removed(self.view, contact_id)
        return True

    def close(self) -> None:
        """Teardown: later results are not applied to state."""
        self._closed = True
        self._cancel_banner()

    # --- render state ---

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def submit_disabled(self) -> bool:
        return not self.form.is_submittable() or self.submitting

    @property
    def submit_label(self) -> str:
        return "Submitting..." if self.submitting else "Add Contact"

    @property
    def contact_count(self) -> int:
        return len(self.view)

    # --- success banner ---

    def _show_success_banner(self) -> None:
        self._cancel_banner()
        self.show_success = True
        loop = asyncio.get_running_loop()
        self._banner_task = loop.create_task(self._hide_success_after())

    async def _hide_success_after(self) -> None:
        await asyncio.sleep(self._success_banner_seconds)
        self.show_success = False

    def _cancel_banner(self) -> None:
        if self._banner_task is not None and not self._banner_task.done():
            self._banner_task.cancel()
        self._banner_task = None
