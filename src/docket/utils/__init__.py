from .errors import (
    DocketError,
    MissingField,
    InvalidFormat,
    WeakPassword,
    DuplicateUnique,
    NotFound,
    RoleMismatch,
    InvalidState,
    MalformedReference,
    InvalidReferences,
    InternalFault,
)
from .logging import setup_logging, JSONFormatter
from .clock import SystemClock, FixedClock, as_utc
from .ids import new_id
from .redis import get_redis_client, redis_key, close_redis

__all__ = [
    "DocketError",
    "MissingField",
    "InvalidFormat",
    "WeakPassword",
    "DuplicateUnique",
    "NotFound",
    "RoleMismatch",
    "InvalidState",
    "MalformedReference",
    "InvalidReferences",
    "InternalFault",
    "setup_logging",
    "JSONFormatter",
    "SystemClock",
    "FixedClock",
    "as_utc",
    "new_id",
    "get_redis_client",
    "redis_key",
    "close_redis",
]
