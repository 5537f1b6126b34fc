"""Identifier generation."""

from uuid import uuid4


def new_id() -> str:
    """Return a fresh identifier, unique across all collections."""
    return str(uuid4())


__all__ = ["new_id"]
