"""Shared error definitions for Docket Desk."""

from typing import Any, Dict, List, Optional


class DocketError(Exception):
    """Base exception for Docket Desk.

    Every subclass carries a machine-readable ``category`` and an HTTP-style
    ``status_code`` so the transport layer can translate it without
    inspecting the message.
    """

    category = "DocketError"
    status_code = 400

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code

    def to_payload(self) -> Dict[str, Any]:
        return {
            "status": self.status_code,
            "error": self.category,
            "details": self.detail,
        }


class MissingField(DocketError):
    """One or more required fields are absent."""
    category = "MissingField"

    def __init__(self, fields: List[str]):
        self.fields = list(fields)
        super().__init__(f"Missing required field(s): {', '.join(self.fields)}")

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["fields"] = self.fields
        return payload


class InvalidFormat(DocketError):
    """A field is present but badly shaped."""
    category = "InvalidFormat"


class WeakPassword(DocketError):
    """Password does not meet the strength policy."""
    category = "WeakPassword"


class DuplicateUnique(DocketError):
    """Username or email already taken."""
    category = "DuplicateUnique"


class NotFound(DocketError):
    """Referenced entity does not exist."""
    category = "NotFound"
    status_code = 404


class RoleMismatch(DocketError):
    """Referenced user does not hold the required role."""
    category = "RoleMismatch"


class InvalidState(DocketError):
    """Mutation attempted on a case that does not accept it."""
    category = "InvalidState"


class MalformedReference(DocketError):
    """Identifier is not a non-empty string."""
    category = "MalformedReference"


class InvalidReferences(DocketError):
    """A batch of references contained at least one invalid entry."""
    category = "InvalidReferences"

    def __init__(self, detail: str, invalid: List[Dict[str, Any]]):
        super().__init__(detail)
        self.invalid = invalid

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["invalid"] = self.invalid
        return payload


class InternalFault(DocketError):
    """Unexpected failure while talking to the store."""
    category = "InternalFault"
    status_code = 500
