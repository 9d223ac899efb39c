"""
List view state: reducer-style transitions over an XState-compatible machine.

The status (loading / empty / populated) follows LIST_VIEW_MACHINE, the same
JSON shape XState uses (id, initial, states with on: { EVENT: target }), run
with xstate-python. The contact tuple is updated by the reducers below.
"""

from dataclasses import dataclass, replace
from enum import Enum

from xstate.machine import Machine

from contactdesk.domain import Contact

LIST_VIEW_MACHINE = {
    "id": "contactList",
    "initial": "loading",
    "states": {
        "loading": {
            "on": {
                "LOADED": "populated",
                "LOADED_EMPTY": "empty",
                "LOAD_FAILED": "empty",
            }
        },
        "empty": {"on": {"CONTACT_ADDED": "populated"}},
        "populated": {"on": {}},
    },
}


class ListStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    POPULATED = "populated"


@dataclass(frozen=True)
class ListView:
    status: ListStatus = ListStatus.LOADING
    contacts: tuple[Contact, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Nothing to show once loading is done (EMPTY, or POPULATED after removing the last one)."""
        return self.status is not ListStatus.LOADING and not self.contacts

    def __len__(self) -> int:
        return len(self.contacts)


_machine: Machine | None = None


def _machine_instance() -> Machine:
    global _machine
    if _machine is None:
        _machine = Machine(LIST_VIEW_MACHINE)
    return _machine


def transition(state_value: str, event: str) -> str | None:
    """Return the next status value for (state_value, event), or None if no transition."""
    try:
        instance = _machine_instance()
        state = instance.state_from(state_value)
        next_state = instance.transition(state, event)
        if next_state.value == state_value:
            return None
        return next_state.value
    except (ValueError, KeyError):
        return None


def _advance(status: ListStatus, event: str) -> ListStatus:
    next_value = transition(status.value, event)
    return ListStatus(next_value) if next_value else status


def loading() -> ListView:
    """Fresh mount: the only way into LOADING."""
    return ListView(status=ListStatus.LOADING, contacts=())


def loaded(view: ListView, contacts) -> ListView:
    """Fetch finished: replace the displayed list."""
    contacts = tuple(contacts)
    event = "LOADED" if contacts else "LOADED_EMPTY"
    return ListView(status=_advance(view.status, event), contacts=contacts)


def load_failed(view: ListView) -> ListView:
    """Fetch failed: treat as empty."""
    return ListView(status=_advance(view.status, "LOAD_FAILED"), contacts=())


def contact_added(view: ListView, contact: Contact) -> ListView:
    return ListView(
        status=_advance(view.status, "CONTACT_ADDED"),
        contacts=(contact, *view.contacts),
    )


def contact_removed(view: ListView, contact_id: str) -> ListView:
    remaining = tuple(c for c in view.contacts if c.id != contact_id)
    return replace(
        view,
        status=_advance(view.status, "CONTACT_REMOVED"),
        contacts=remaining,
    )
