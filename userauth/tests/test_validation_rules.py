from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from userauth.interfaces.http.dto import rules
from userauth.interfaces.http.dto.auth import LoginRequestDTO, RegisterRequestDTO
from userauth.shared.errors import ValidationError
from userauth.shared.errors.validation import format_pydantic_errors, raise_validation_error


@pytest.mark.parametrize("name", ["Ann", "A" * 30, "  Bob  "])
def test_check_name_accepts_bounds(name: str) -> None:
    assert rules.check_name(name) == name.strip()


@pytest.mark.parametrize(("name", "error_type"), [("", "missing"), ("   ", "missing"), ("Al", "name_length"), ("A" * 31, "name_length")])
def test_check_name_rejects(name: str, error_type: str) -> None:
    with pytest.raises(PydanticCustomError) as excinfo:
        rules.check_name(name)

    assert excinfo.value.type == error_type


def test_check_email_normalizes() -> None:
    assert rules.check_email("  Ann@X.COM ") == "ann@x.com"


@pytest.mark.parametrize("email", ["plainaddress", "ann@", "@x.com", "ann at x.com"])
def test_check_email_rejects(email: str) -> None:
    with pytest.raises(PydanticCustomError) as excinfo:
        rules.check_email(email)

    assert excinfo.value.type == "email_invalid"
    assert excinfo.value.message() == "Please include a valid email"


def test_check_password_length() -> None:
    assert rules.check_password("secret") == "secret"
    with pytest.raises(PydanticCustomError) as excinfo:
        rules.check_password("short")

    assert excinfo.value.type == "password_too_short"


def test_login_password_is_not_stripped() -> None:
    dto = LoginRequestDTO.model_validate({"name": "Ann", "email": "ann@x.com", "password": " pw "})

    assert dto.password == " pw "


def test_login_rejects_blank_fields() -> None:
    with pytest.raises(PydanticValidationError) as excinfo:
        LoginRequestDTO.model_validate({"name": "  ", "email": "", "password": ""})

    assert format_pydantic_errors(excinfo.value)["fields"] == ["email", "name", "password"]


def test_register_dto_ignores_unknown_fields() -> None:
    dto = RegisterRequestDTO.model_validate(
        {"name": "Ann", "email": "ann@x.com", "password": "secret1", "admin": True}
    )

    assert dto.model_dump() == {"name": "Ann", "email": "ann@x.com", "password": "secret1"}


def test_raise_validation_error_wraps_context() -> None:
    with pytest.raises(PydanticValidationError) as pydantic_error:
        RegisterRequestDTO.model_validate({"name": "Ann", "email": "ann@x.com", "password": "123"})

    with pytest.raises(ValidationError) as excinfo:
        raise_validation_error(pydantic_error.value)

    payload = excinfo.value.to_dict()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == ["password"]
    assert payload["context"]["errors"][0]["ctx"] == {"min_length": 6}


@pytest.mark.parametrize("email", ["Ann <ann@x.com>", '"Ann" <ann@x.com>', "<ann@x.com>"])
def test_check_email_rejects_display_names(email: str) -> None:
    with pytest.raises(PydanticCustomError) as excinfo:
        rules.check_email(email)

    assert excinfo.value.type == "email_invalid"


@pytest.mark.parametrize(
    ("registered", "typed_at_login"),
    [
        ("Ann@X.COM", "  ann@x.com "),
        ("jos\u00e9@x.com", "JOS\u00c9@X.com"),
    ],
)
def test_login_lookup_matches_stored_email(registered: str, typed_at_login: str) -> None:
    assert rules.check_login_email(typed_at_login) == rules.check_email(registered)


def test_login_email_without_format_check_is_still_accepted() -> None:
    dto = LoginRequestDTO.model_validate({"name": "Ann", "email": " Not-An-Email ", "password": "pw"})

    assert dto.email == "not-an-email"
