"""Hearing scheduling and lookup."""

from typing import List
import logging

from docket import rules
from docket.schemas.entities import Hearing
from docket.schemas.requests import HearingCreate
from docket.services.base import ServiceContext, commit
from docket.store.base import Collection
from docket.utils.errors import NotFound

logger = logging.getLogger(__name__)

REQUIRED_HEARING_FIELDS = ("caseId", "judgeId", "date", "location", "description")


async def create_hearing(ctx: ServiceContext, request: HearingCreate) -> Hearing:
    """Schedule a hearing.

    The case must exist and the judge id must name an existing user. The
    user's role is not checked here, and neither is the case status.
    """
    rules.require_fields(ctx.payload(request), REQUIRED_HEARING_FIELDS)
    await ctx.guard.require_case(request.case_id, lookup=False)
    if not await ctx.guard.user_exists(request.judge_id):
        raise NotFound(f"Judge with id {request.judge_id} not found", status_code=400)

    hearing = Hearing(
        id=ctx.new_id(),
        case_id=request.case_id,
        judge_id=request.judge_id,
        date=request.date,
        location=request.location,
        description=request.description,
        created_at=ctx.clock.now(),
    )
    await commit(ctx, Collection.HEARINGS, hearing)

    logger.info(f"[hearings] Scheduled hearing {hearing.id} for case {hearing.case_id}")
    return hearing


async def list_hearings(ctx: ServiceContext) -> List[Hearing]:
    return await ctx.store.scan(Collection.HEARINGS)


async def get_hearing(ctx: ServiceContext, hearing_id: str) -> Hearing:
    hearing = await ctx.store.get(Collection.HEARINGS, hearing_id)
    if hearing is None:
        raise NotFound(f"Hearing with id {hearing_id} not found")
    return hearing


__all__ = ["create_hearing", "list_hearings", "get_hearing"]
