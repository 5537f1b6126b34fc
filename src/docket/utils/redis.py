"""Process-wide Redis client for the Redis entity store."""

from typing import Optional
import logging

import redis.asyncio as redis

logger = logging.getLogger(__name__)

_redis_client: Optional[redis.Redis] = None


def get_redis_client(url: Optional[str] = None) -> redis.Redis:
    """Return the shared client, creating its pool on first use.

    ``url`` only matters on the first call; later calls reuse the pool.
    """
    global _redis_client

    if _redis_client is None:
        from ..config import settings
        url = url or settings.REDIS_URL
        _redis_client = redis.from_url(url, decode_responses=True)
        logger.info("[redis] Client created")

    return _redis_client


def redis_key(prefix: str, *parts: str) -> str:
    """Namespaced key, e.g. ``redis_key("docket", "cases") -> "docket:cases"``."""
    return ":".join((prefix,) + parts)


async def close_redis() -> None:
    global _redis_client

    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
        logger.info("[redis] Client closed")


__all__ = ["get_redis_client", "redis_key", "close_redis"]
