from docket.store.base import Collection, EntityStore, RECORD_TYPES
from docket.store.memory import InMemoryEntityStore
from docket.store.sql import SqlEntityStore
from docket.store.redis import RedisEntityStore

STORE_BACKENDS = ("sql", "redis", "memory")


def build_store(settings) -> EntityStore:
    """Create the store selected by ``settings.STORE_BACKEND``."""
    backend = settings.STORE_BACKEND.lower()
    if backend == "memory":
        return InMemoryEntityStore()
    if backend == "sql":
        from docket.database import async_session
        return SqlEntityStore(async_session)
    if backend == "redis":
        from docket.utils.redis import get_redis_client
        return RedisEntityStore(get_redis_client(settings.REDIS_URL), prefix=settings.REDIS_KEY_PREFIX)
    raise ValueError(
        f"Unknown STORE_BACKEND '{settings.STORE_BACKEND}', expected one of {', '.join(STORE_BACKENDS)}"
    )


__all__ = [
    "Collection",
    "EntityStore",
    "RECORD_TYPES",
    "InMemoryEntityStore",
    "SqlEntityStore",
    "RedisEntityStore",
    "STORE_BACKENDS",
    "build_store",
]
