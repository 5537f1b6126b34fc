"""Redis-backed store: one hash per collection, records kept as JSON."""

from typing import List, Optional

import redis.asyncio as redis

from docket.schemas.entities import Record
from docket.store.base import RECORD_TYPES, Collection, EntityStore
from docket.utils.redis import redis_key


class RedisEntityStore(EntityStore):
    def __init__(self, client: redis.Redis, prefix: str = "docket"):
        self._client = client
        self._prefix = prefix

    def _key(self, collection: Collection) -> str:
        return redis_key(self._prefix, collection.value)

    async def get(self, collection: Collection, entity_id: str) -> Optional[Record]:
        raw = await self._client.hget(self._key(collection), entity_id)
        if raw is None:
            return None
        return RECORD_TYPES[collection].model_validate_json(raw)

    async def put(self, collection: Collection, entity_id: str, entity: Record) -> None:
        await self._client.hset(self._key(collection), entity_id, entity.model_dump_json())

    async def delete(self, collection: Collection, entity_id: str) -> None:
        await self._client.hdel(self._key(collection), entity_id)

    async def scan(self, collection: Collection) -> List[Record]:
        raw_values = await self._client.hvals(self._key(collection))
        record_type = RECORD_TYPES[collection]
        records = [record_type.model_validate_json(raw) for raw in raw_values]
        # Hash order is arbitrary; creation order keeps scans reproducible
        return sorted(records, key=lambda r: (r.created_at, r.id))


__all__ = ["RedisEntityStore"]
