"""FastAPI dependencies."""

from fastapi import Request

from docket.passwords import PasswordHasher
from docket.services.base import ServiceContext
from docket.store import build_store
from docket.utils.clock import SystemClock


def build_context(settings) -> ServiceContext:
    """Wire the configured store, the system clock and the password scheme."""
    return ServiceContext(
        store=build_store(settings),
        clock=SystemClock(),
        passwords=PasswordHasher(settings.PASSWORD_SCHEME),
    )


def get_context(request: Request) -> ServiceContext:
    """Dependency returning the context created at startup."""
    return request.app.state.context


__all__ = ["build_context", "get_context"]
