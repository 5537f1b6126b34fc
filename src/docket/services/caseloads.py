"""Per-judge and per-lawyer views.

Each call first resolves the subject user from the path: an unknown id is a
404 and a user with another role is a 403.
"""

from typing import List

from docket import queries
from docket.schemas.entities import Case, Hearing, UserRole
from docket.services.base import ServiceContext


async def judge_cases(ctx: ServiceContext, judge_id: str) -> queries.JudgeCaseload:
    await ctx.guard.require_user(judge_id, UserRole.JUDGE, lookup=True)
    return await queries.judge_caseload(ctx.store, judge_id)


async def lawyer_cases(ctx: ServiceContext, lawyer_id: str) -> List[Case]:
    await ctx.guard.require_user(lawyer_id, UserRole.LAWYER, lookup=True)
    return await queries.lawyer_caseload(ctx.store, lawyer_id)


async def judge_hearings(ctx: ServiceContext, judge_id: str) -> List[Hearing]:
    await ctx.guard.require_user(judge_id, UserRole.JUDGE, lookup=True)
    return await queries.judge_hearings(ctx.store, judge_id)


async def judge_upcoming_hearings(ctx: ServiceContext, judge_id: str) -> List[Hearing]:
    await ctx.guard.require_user(judge_id, UserRole.JUDGE, lookup=True)
    return await queries.upcoming_hearings(ctx.store, judge_id, ctx.clock.now())


__all__ = ["judge_cases", "lawyer_cases", "judge_hearings", "judge_upcoming_hearings"]
