"""Process-local store, used by tests and ``STORE_BACKEND=memory``."""

from typing import Dict, List, Optional

from docket.schemas.entities import Record
from docket.store.base import Collection, EntityStore


class InMemoryEntityStore(EntityStore):
    def __init__(self):
        self._collections: Dict[Collection, Dict[str, Record]] = {
            collection: {} for collection in Collection
        }

    async def get(self, collection: Collection, entity_id: str) -> Optional[Record]:
        entity = self._collections[collection].get(entity_id)
        return entity.model_copy(deep=True) if entity is not None else None

    async def put(self, collection: Collection, entity_id: str, entity: Record) -> None:
        self._collections[collection][entity_id] = entity.model_copy(deep=True)

    async def delete(self, collection: Collection, entity_id: str) -> None:
        self._collections[collection].pop(entity_id, None)

    async def scan(self, collection: Collection) -> List[Record]:
        # Insertion order; re-putting an existing key keeps its position
        return [e.model_copy(deep=True) for e in self._collections[collection].values()]
