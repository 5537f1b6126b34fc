"""Docket Desk - users, cases and hearings with relational integrity checks."""

__version__ = "0.1.0"

from .config import Settings, settings
from .schemas import UserRole, CaseStatus, UserProfile, Case, Hearing
from .store import (
    Collection,
    EntityStore,
    InMemoryEntityStore,
    SqlEntityStore,
    RedisEntityStore,
    build_store,
)
from .integrity import IntegrityGuard, ReferenceCheck
from .passwords import PasswordHasher, legacy_obfuscate
from .services import ServiceContext
from .utils import (
    setup_logging,
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
    SystemClock,
    FixedClock,
    new_id,
)

__all__ = [
    "Settings",
    "settings",
    "UserRole",
    "CaseStatus",
    "UserProfile",
    "Case",
    "Hearing",
    "Collection",
    "EntityStore",
    "InMemoryEntityStore",
    "SqlEntityStore",
    "RedisEntityStore",
    "build_store",
    "IntegrityGuard",
    "ReferenceCheck",
    "PasswordHasher",
    "legacy_obfuscate",
    "ServiceContext",
    "setup_logging",
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
    "SystemClock",
    "FixedClock",
    "new_id",
]
