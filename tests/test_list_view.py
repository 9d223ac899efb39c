"""Tests for list view transitions and the status machine."""

from datetime import datetime, timezone

from contactdesk.application import ListStatus
from contactdesk.application import list_view
from contactdesk.application.list_view import transition
from contactdesk.domain import Contact


def _contact(cid: str, name: str = "Jo") -> Contact:
    return Contact(
        id=cid,
        name=name,
        email="jo@x.com",
        phone="1234567890",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def test_machine_transitions():
    assert transition("loading", "LOADED") == "populated"
    assert transition("loading", "LOADED_EMPTY") == "empty"
    assert transition("loading", "LOAD_FAILED") == "empty"
    assert transition("empty", "CONTACT_ADDED") == "populated"
    assert transition("populated", "CONTACT_ADDED") is None
    assert transition("populated", "CONTACT_REMOVED") is None


def test_no_transition_back_to_loading():
    assert transition("populated", "LOADED") is None
    assert transition("empty", "LOADED_EMPTY") is None


def test_loading_is_distinct_from_empty():
    view = list_view.loading()
    assert view.status is ListStatus.LOADING
    assert view.contacts == ()
    assert view.is_empty is False


def test_loaded_empty_and_populated():
    empty = list_view.loaded(list_view.loading(), [])
    assert empty.status is ListStatus.EMPTY
    assert empty.is_empty is True

    populated = list_view.loaded(list_view.loading(), [_contact("2"), _contact("1")])
    assert populated.status is ListStatus.POPULATED
    assert [c.id for c in populated.contacts] == ["2", "1"]


def test_load_failed_is_empty():
    view = list_view.load_failed(list_view.loading())
    assert view.status is ListStatus.EMPTY
    assert view.contacts == ()


def test_add_prepends_and_populates():
    view = list_view.loaded(list_view.loading(), [])
    view = list_view.contact_added(view, _contact("1"))
    assert view.status is ListStatus.POPULATED
    view = list_view.contact_added(view, _contact("2"))
    assert view.status is ListStatus.POPULATED
    assert [c.id for c in view.contacts] == ["2", "1"]


def test_add_while_loading_stays_loading():
    view = list_view.contact_added(list_view.loading(), _contact("1"))
    assert view.status is ListStatus.LOADING
    assert len(view) == 1


def test_remove_keeps_status_name():
    view = list_view.loaded(list_view.loading(), [_contact("1")])
    view = list_view.contact_removed(view, "1")
    assert view.status is ListStatus.POPULATED
    assert view.contacts == ()
    assert view.is_empty is True


def test_remove_unknown_id_is_noop():
    view = list_view.loaded(list_view.loading(), [_contact("1")])
    assert list_view.contact_removed(view, "nope") == view


def test_transitions_do_not_mutate_input():
    original = list_view.loaded(list_view.loading(), [_contact("1")])
    list_view.contact_added(original, _contact("2"))
    list_view.contact_removed(original, "1")
    assert [c.id for c in original.contacts] == ["1"]
