"""Collaborators shared by every service call."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict
import logging

from docket.integrity import IntegrityGuard
from docket.passwords import PasswordHasher
from docket.schemas.entities import Record
from docket.store.base import Collection, EntityStore
from docket.utils.clock import SystemClock
from docket.utils.errors import InternalFault
from docket.utils.ids import new_id

logger = logging.getLogger(__name__)


@dataclass
class ServiceContext:
    """Store, clock, id generator and password hasher injected into services."""

    store: EntityStore
    clock: Any = field(default_factory=SystemClock)
    new_id: Callable[[], str] = new_id
    passwords: PasswordHasher = field(default_factory=PasswordHasher)

    def __post_init__(self):
        self.guard = IntegrityGuard(self.store)

    def payload(self, request) -> Dict[str, Any]:
        """Request body as a camelCase dict, the names callers see in errors."""
        return request.model_dump(by_alias=True)


async def commit(ctx: ServiceContext, collection: Collection, record: Record) -> Record:
    """Write ``record`` and surface any store failure as ``InternalFault``."""
    try:
        await ctx.store.put(collection, record.id, record)
    except Exception as e:
        logger.exception(f"[store] Failed to write {collection.value}/{record.id}")
        raise InternalFault(f"Server error occurred while saving {collection.value}") from e
    return record


__all__ = ["ServiceContext", "commit"]
