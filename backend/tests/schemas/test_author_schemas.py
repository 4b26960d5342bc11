"""Author schemas — binding-layer validation and sparse-patch presence.

Invariants:
    - Create payload requires all three fields with the documented messages
    - Update payload distinguishes absent, null and blank fields
"""

import pytest
from pydantic import ValidationError

from app.schemas.author import AuthorCreate, AuthorUpdate


def _messages(exc: ValidationError) -> dict:
    return {str(e["loc"][-1]): e["msg"] for e in exc.errors()}


# --- AuthorCreate -------------------------------------------------------------

def test_author_create_accepts_valid_payload():
    a = AuthorCreate(name="Ada", email="ada@example.com", about="Writes")
    assert a.name == "Ada"


def test_author_create_short_name_message():
    with pytest.raises(ValidationError) as exc:
        AuthorCreate(name="Al", email="al@example.com", about="x")
    assert _messages(exc.value) == {
        "name": "Name must be at least 3 characters long",
    }


def test_author_create_invalid_email_message():
    with pytest.raises(ValidationError) as exc:
        AuthorCreate(name="Ada", email="not-an-email", about="x")
    assert _messages(exc.value) == {"email": "Email should be valid"}


def test_author_create_empty_about_message():
    with pytest.raises(ValidationError) as exc:
        AuthorCreate(name="Ada", email="ada@example.com", about="")
    assert _messages(exc.value)["about"] == (
        "About section must be at least 1 characters long"
    )


def test_author_create_missing_fields():
    with pytest.raises(ValidationError) as exc:
        AuthorCreate()
    assert set(_messages(exc.value)) == {"name", "email", "about"}


# --- AuthorUpdate -------------------------------------------------------------

def test_author_update_empty_has_no_present_fields():
    assert AuthorUpdate().present_fields() == {}


def test_author_update_present_fields_only_sent_ones():
    patch = AuthorUpdate.model_validate({"about": "x"})
    assert patch.present_fields() == {"about": "x"}


def test_author_update_explicit_null_is_present():
    patch = AuthorUpdate.model_validate({"name": None})
    assert patch.present_fields() == {"name": None}


def test_author_update_name_length_bounds():
    with pytest.raises(ValidationError) as exc:
        AuthorUpdate(name="A")
    assert _messages(exc.value) == {
        "name": "Name must be between 2 and 50 characters",
    }
    with pytest.raises(ValidationError):
        AuthorUpdate(name="A" * 51)


def test_author_update_about_max_length():
    with pytest.raises(ValidationError) as exc:
        AuthorUpdate(about="x" * 201)
    assert "about" in _messages(exc.value)


def test_author_update_blank_name_passes_binding():
    """Whitespace-only names satisfy the length rule; the service rejects them."""
    assert AuthorUpdate(name="   ").name == "   "
