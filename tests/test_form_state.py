"""Unit tests for FormState: change, blur, submit validation and submittability."""

import pytest

from contactdesk.application import ContactDraft, FormState


def _valid_form() -> FormState:
    form = FormState()
    form.on_field_change("name", "Jo")
    form.on_field_change("email", "jo@x.com")
    form.on_field_change("phone", "1234567890")
    return form


def test_change_updates_draft() -> None:
    form = FormState()
    form.on_field_change("name", "Alice")
    form.on_field_change("message", "hi")
    assert form.draft == ContactDraft(name="Alice", message="hi")


def test_change_unknown_field_raises() -> None:
    form = FormState()
    with pytest.raises(ValueError):
        form.on_field_change("age", "3")


def test_blur_sets_and_clears_only_that_field() -> None:
    form = FormState()
    form.on_field_blur("name")
    form.on_field_blur("email")
    assert form.errors == {"name": "Name is required", "email": "Email is required"}

    form.on_field_change("name", "Jo")
    form.on_field_blur("name")
    assert form.errors == {"email": "Email is required"}


def test_blur_message_is_noop() -> None:
    form = FormState()
    form.on_field_blur("message")
    assert form.errors == {}


def test_change_blanks_recorded_message_but_keeps_key() -> None:
    form = FormState()
    form.on_field_blur("email")
    assert form.error_for("email") == "Email is required"

    form.on_field_change("email", "jo@x.com")
    assert form.errors == {"email": ""}
    assert form.error_for("email") is None


def test_change_without_recorded_error_leaves_map_untouched() -> None:
    form = FormState()
    form.on_field_change("name", "J")
    assert form.errors == {}


def test_submittable_requires_field_checks_and_empty_error_map() -> None:
    form = _valid_form()
    assert form.is_submittable() is True


def test_stale_blank_entry_blocks_submit_until_blur() -> None:
    form = FormState()
    form.on_field_blur("email")
    form.on_field_change("name", "Jo")
    form.on_field_change("email", "jo@x.com")
    form.on_field_change("phone", "1234567890")
    # Field checks pass but the map still has a (blank) email key.
    assert form.is_submittable() is False

    form.on_field_blur("email")
    assert form.is_submittable() is True


def test_field_checks_block_even_with_empty_error_map() -> None:
    form = FormState()
    form.on_field_change("name", "Jo")
    form.on_field_change("email", "jo@x.com")
    form.on_field_change("phone", "123")
    assert form.errors == {}
    assert form.is_submittable() is False


def test_name_of_one_char_passes_light_check() -> None:
    # The submittability check only needs a non-empty name; submit validation catches length.
    form = _valid_form()
    form.on_field_change("name", "J")
    assert form.is_submittable() is True
    assert form.validate() == {"name": "Name must be at least 2 characters"}
    assert form.is_submittable() is False


def test_validate_replaces_error_map() -> None:
    form = FormState()
    form.on_field_blur("name")
    form.on_field_change("name", "Jo")
    errors = form.validate()
    assert set(errors) == {"email", "phone"}
    assert form.errors == errors


def test_errors_are_snapshots() -> None:
    form = FormState()
    snapshot = form.errors
    form.on_field_blur("name")
    assert snapshot == {}


def test_reset_discards_draft_and_errors() -> None:
    form = _valid_form()
    form.on_field_blur("name")
    form.validate()
    form.reset()
    assert form.draft == ContactDraft()
    assert form.errors == {}
