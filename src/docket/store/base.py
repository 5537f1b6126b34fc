"""Entity store interface shared by every backend."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type
import enum

from docket.schemas.entities import Case, Hearing, Record, UserProfile


class Collection(str, enum.Enum):
    USERS = "users"
    CASES = "cases"
    HEARINGS = "hearings"


RECORD_TYPES: Dict[Collection, Type[Record]] = {
    Collection.USERS: UserProfile,
    Collection.CASES: Case,
    Collection.HEARINGS: Hearing,
}


class EntityStore(ABC):
    """Keyed collections of users, cases and hearings.

    Implementations hand out copies: changing a returned record has no effect
    until it is written back with :meth:`put`. Scan order is backend-defined
    but stable between calls on unchanged data.
    """

    @abstractmethod
    async def get(self, collection: Collection, entity_id: str) -> Optional[Record]:
        ...

    @abstractmethod
    async def put(self, collection: Collection, entity_id: str, entity: Record) -> None:
        ...

    @abstractmethod
    async def delete(self, collection: Collection, entity_id: str) -> None:
        ...

    @abstractmethod
    async def scan(self, collection: Collection) -> List[Record]:
        ...

    async def close(self) -> None:
        """Release backend resources."""


__all__ = ["Collection", "RECORD_TYPES", "EntityStore"]
