"""Cross-entity integrity guards run before every write.

Predicates (``user_exists``, ``case_is_open_for_modification``, ...) answer
questions; ``require_*`` resolvers return the referenced entity or raise the
matching :mod:`docket.utils.errors` exception.

A reference can be checked in two positions. A *lookup* subject is the
entity named in the request path: missing means 404 and a wrong role means
403. A *body* reference is an identifier supplied in the payload: both
failures are integrity errors and map to 400.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
import logging

from docket.rules import is_malformed_reference, is_open_for_modification
from docket.schemas.entities import Case, UserProfile, UserRole
from docket.store.base import Collection, EntityStore
from docket.utils.errors import (
    DuplicateUnique,
    InvalidReferences,
    InvalidState,
    MalformedReference,
    NotFound,
    RoleMismatch,
)

logger = logging.getLogger(__name__)

UNIQUE_USER_FIELDS = ("username", "email")

_ROLE_NOUNS = {
    UserRole.JUDGE: "judge",
    UserRole.LAWYER: "lawyer",
    UserRole.COURT_STAFF: "court staff member",
    UserRole.LITIGANT: "litigant",
}


def _role_noun(role: UserRole) -> str:
    return _ROLE_NOUNS[role]


@dataclass
class InvalidReference:
    id: Any
    reason: str
    category: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "reason": self.reason, "category": self.category}


@dataclass
class ReferenceCheck:
    valid: List[str] = field(default_factory=list)
    invalid: List[InvalidReference] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.invalid


class IntegrityGuard:
    def __init__(self, store: EntityStore):
        self.store = store

    # ===== PREDICATES =====

    async def user_exists(self, user_id: str) -> bool:
        return await self.store.get(Collection.USERS, user_id) is not None

    async def user_has_role(self, user_id: str, role: UserRole) -> bool:
        user = await self.store.get(Collection.USERS, user_id)
        return user is not None and user.role == role

    async def case_exists(self, case_id: str) -> bool:
        return await self.store.get(Collection.CASES, case_id) is not None

    async def case_is_open_for_modification(self, case_id: str) -> bool:
        case = await self.store.get(Collection.CASES, case_id)
        return case is not None and is_open_for_modification(case)

    async def ensure_unique(self, field_name: str, value: str, exclude_id: Optional[str] = None) -> None:
        """Raise ``DuplicateUnique`` if another live user already holds ``value``."""
        if field_name not in UNIQUE_USER_FIELDS:
            raise ValueError(f"{field_name} is not a unique user field")
        for user in await self.store.scan(Collection.USERS):
            if user.id == exclude_id:
                continue
            if getattr(user, field_name) == value:
                raise DuplicateUnique(
                    f"{field_name.capitalize()} already exists: Ensure '{field_name}' is unique."
                )

    async def dedupe_and_validate_ids(self, ids: Iterable[Any], required_role: UserRole) -> ReferenceCheck:
        """Classify every entry; valid ids come back deduplicated in first-seen order."""
        check = ReferenceCheck()
        noun = _role_noun(required_role)
        seen = set()
        for user_id in ids:
            if is_malformed_reference(user_id):
                check.invalid.append(
                    InvalidReference(user_id, "Invalid ID format", MalformedReference.category)
                )
                continue

            user = await self.store.get(Collection.USERS, user_id)
            if user is None:
                check.invalid.append(
                    InvalidReference(user_id, f"{noun.capitalize()} not found", NotFound.category)
                )
                continue

            if user.role != required_role:
                check.invalid.append(
                    InvalidReference(user_id, f"User is not a {noun}", RoleMismatch.category)
                )
                continue

            if user_id not in seen:
                seen.add(user_id)
                check.valid.append(user_id)
        return check

    # ===== RESOLVERS =====

    async def require_user(
        self,
        user_id: str,
        role: Optional[UserRole] = None,
        lookup: bool = False,
    ) -> UserProfile:
        noun = _role_noun(role) if role is not None else "user"
        user = await self.store.get(Collection.USERS, user_id)
        if user is None:
            raise NotFound(
                f"{noun.capitalize()} with id {user_id} not found",
                status_code=404 if lookup else 400,
            )
        if role is not None and user.role != role:
            raise RoleMismatch(
                f"User is not a {noun}",
                status_code=403 if lookup else 400,
            )
        return user

    async def require_case(self, case_id: str, lookup: bool = True) -> Case:
        case = await self.store.get(Collection.CASES, case_id)
        if case is None:
            raise NotFound(
                f"Case with id {case_id} not found",
                status_code=404 if lookup else 400,
            )
        return case

    def require_open(self, case: Case, action: str) -> None:
        if not is_open_for_modification(case):
            raise InvalidState(f"Cannot modify {action} for a closed case")

    async def require_valid_ids(self, ids: Iterable[Any], role: UserRole, field_name: str) -> List[str]:
        """Validate a whole batch; any invalid entry rejects all of it."""
        check = await self.dedupe_and_validate_ids(ids, role)
        if not check.ok:
            noun = _role_noun(role)
            logger.info(f"[integrity] Rejected {len(check.invalid)} invalid {field_name} entries")
            raise InvalidReferences(
                f"One or more {noun} IDs are invalid or not associated with {noun} accounts",
                invalid=[entry.to_dict() for entry in check.invalid],
            )
        return check.valid


__all__ = ["InvalidReference", "ReferenceCheck", "IntegrityGuard", "UNIQUE_USER_FIELDS"]
