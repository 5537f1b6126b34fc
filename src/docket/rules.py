"""Pure validation rules over request and entity data."""

from typing import Any, Iterable, List, Mapping
import re

from docket.schemas.entities import Case, UserRole
from docket.utils.errors import InvalidFormat, MissingField, WeakPassword

SPECIAL_CHARACTERS = '!@#$%^&*(),.?":{}|<>'
MIN_PASSWORD_LENGTH = 8

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"\d")
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")


def is_password_secure(password: str) -> bool:
    return (
        len(password) >= MIN_PASSWORD_LENGTH
        and bool(_UPPERCASE.search(password))
        and bool(_LOWERCASE.search(password))
        and bool(_DIGIT.search(password))
        and bool(_SPECIAL.search(password))
    )


def ensure_password_secure(password: str) -> None:
    if not is_password_secure(password):
        raise WeakPassword(
            "Weak password: Ensure 'password' is at least 8 characters long, contains an "
            "uppercase letter, a lowercase letter, a digit, and a special character."
        )


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def ensure_valid_email(email: str) -> None:
    if not is_valid_email(email):
        raise InvalidFormat("Invalid email format: Ensure 'email' is a valid email address.")


def is_missing(value: Any) -> bool:
    return value is None or value == ""


def missing_fields(payload: Mapping[str, Any], required: Iterable[str]) -> List[str]:
    return [name for name in required if is_missing(payload.get(name))]


def require_fields(payload: Mapping[str, Any], required: Iterable[str]) -> None:
    """Raise ``MissingField`` naming every required field that is absent or empty."""
    missing = missing_fields(payload, required)
    if missing:
        raise MissingField(missing)


def parse_role(value: Any) -> UserRole:
    if isinstance(value, UserRole):
        return value
    try:
        return UserRole(value)
    except ValueError:
        accepted = ", ".join(role.value for role in UserRole)
        raise InvalidFormat(f"Invalid role '{value}': expected one of {accepted}.")


def is_open_for_modification(case: Case) -> bool:
    return not case.is_closed


def is_malformed_reference(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


__all__ = [
    "SPECIAL_CHARACTERS",
    "MIN_PASSWORD_LENGTH",
    "EMAIL_PATTERN",
    "is_password_secure",
    "ensure_password_secure",
    "is_valid_email",
    "ensure_valid_email",
    "is_missing",
    "missing_fields",
    "require_fields",
    "parse_role",
    "is_open_for_modification",
    "is_malformed_reference",
]
