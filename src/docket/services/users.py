"""User account operations."""

from typing import List
import logging

from docket import rules
from docket.schemas.entities import UserProfile
from docket.schemas.requests import UserCreate, UserUpdate
from docket.services.base import ServiceContext, commit
from docket.store.base import Collection
from docket.utils.errors import InternalFault, InvalidFormat, NotFound

logger = logging.getLogger(__name__)

REQUIRED_USER_FIELDS = ("username", "email", "password", "role")


async def create_user(ctx: ServiceContext, request: UserCreate) -> UserProfile:
    rules.require_fields(ctx.payload(request), REQUIRED_USER_FIELDS)
    rules.ensure_valid_email(request.email)
    rules.ensure_password_secure(request.password)
    role = rules.parse_role(request.role)

    await ctx.guard.ensure_unique("username", request.username)
    await ctx.guard.ensure_unique("email", request.email)

    user = UserProfile(
        id=ctx.new_id(),
        username=request.username,
        email=request.email,
        password=ctx.passwords.hash(request.password),
        role=role,
        created_at=ctx.clock.now(),
    )
    await commit(ctx, Collection.USERS, user)

    logger.info(f"[users] Created user: {user.id} ({role.value})")
    return user


async def update_user(ctx: ServiceContext, user_id: str, request: UserUpdate) -> UserProfile:
    """Apply the supplied fields; absent ones are left untouched."""
    user = await get_user(ctx, user_id)
    changes = request.model_dump(exclude_unset=True, exclude_none=True)

    if changes.get("username") == "":
        raise InvalidFormat("Invalid username: 'username' cannot be empty.")
    if "email" in changes:
        rules.ensure_valid_email(changes["email"])
    if "password" in changes:
        rules.ensure_password_secure(changes["password"])
        changes["password"] = ctx.passwords.hash(changes["password"])
    if "role" in changes:
        changes["role"] = rules.parse_role(changes["role"])
    for field_name in ("username", "email"):
        if field_name in changes:
            await ctx.guard.ensure_unique(field_name, changes[field_name], exclude_id=user.id)

    updated = user.model_copy(update={**changes, "updated_at": ctx.clock.now()})
    await commit(ctx, Collection.USERS, updated)

    logger.info(f"[users] Updated user: {user.id} fields={sorted(changes)}")
    return updated


async def delete_user(ctx: ServiceContext, user_id: str) -> None:
    """Remove the user. Cases and hearings that reference it are left as they are."""
    await get_user(ctx, user_id)
    try:
        await ctx.store.delete(Collection.USERS, user_id)
    except Exception as e:
        logger.exception(f"[users] Failed to delete user {user_id}")
        raise InternalFault("Server error occurred while deleting the user.") from e
    logger.info(f"[users] Deleted user: {user_id}")


async def list_users(ctx: ServiceContext) -> List[UserProfile]:
    return await ctx.store.scan(Collection.USERS)


async def get_user(ctx: ServiceContext, user_id: str) -> UserProfile:
    user = await ctx.store.get(Collection.USERS, user_id)
    if user is None:
        raise NotFound(f"User with id {user_id} not found")
    return user


__all__ = ["create_user", "update_user", "delete_user", "list_users", "get_user"]
