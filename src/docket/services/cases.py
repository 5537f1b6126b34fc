"""Case operations: creation, status changes and judge/lawyer assignment."""

from typing import Any, List
import logging

from docket import rules
from docket.schemas.entities import Case, CaseStatus, UserRole
from docket.schemas.requests import CaseCreate, CaseStatusUpdate, JudgeAssignment, LawyerAssignment
from docket.schemas.responses import (
    JudgeAssignmentData,
    LawyerAssignmentData,
    LawyerSummary,
    UserOut,
)
from docket.services.base import ServiceContext, commit
from docket.store.base import Collection
from docket.utils.errors import InvalidFormat

logger = logging.getLogger(__name__)

REQUIRED_CASE_FIELDS = ("caseNumber", "title", "description")


def _ensure_id_list(value: Any) -> List[Any]:
    if not isinstance(value, list):
        raise InvalidFormat("Invalid data type for lawyerIds: lawyerIds must be an array of strings")
    return value


async def create_case(ctx: ServiceContext, request: CaseCreate) -> Case:
    rules.require_fields(ctx.payload(request), REQUIRED_CASE_FIELDS)

    judge_id = None
    if not rules.is_missing(request.judge_id):
        judge = await ctx.guard.require_user(request.judge_id, UserRole.JUDGE)
        judge_id = judge.id

    lawyer_ids: List[str] = []
    if request.lawyer_ids is not None:
        lawyer_ids = await ctx.guard.require_valid_ids(
            _ensure_id_list(request.lawyer_ids), UserRole.LAWYER, "lawyerIds"
        )

    case = Case(
        id=ctx.new_id(),
        case_number=request.case_number,
        title=request.title,
        description=request.description,
        status=CaseStatus.OPEN,
        judge_id=judge_id,
        lawyer_ids=lawyer_ids,
        created_at=ctx.clock.now(),
    )
    await commit(ctx, Collection.CASES, case)

    logger.info(f"[cases] Created case: {case.id}")
    return case


async def list_cases(ctx: ServiceContext) -> List[Case]:
    return await ctx.store.scan(Collection.CASES)


async def get_case(ctx: ServiceContext, case_id: str) -> Case:
    return await ctx.guard.require_case(case_id)


async def update_case_status(ctx: ServiceContext, case_id: str, request: CaseStatusUpdate) -> Case:
    """Overwrite the status. Any string is accepted; there is no transition table."""
    rules.require_fields(ctx.payload(request), ("status",))
    case = await ctx.guard.require_case(case_id)

    updated = case.model_copy(update={"status": request.status, "updated_at": ctx.clock.now()})
    await commit(ctx, Collection.CASES, updated)

    logger.info(f"[cases] Case {case_id} status {case.status!r} -> {request.status!r}")
    return updated


async def assign_judge(ctx: ServiceContext, case_id: str, request: JudgeAssignment) -> JudgeAssignmentData:
    rules.require_fields(ctx.payload(request), ("judgeId",))
    case = await ctx.guard.require_case(case_id)
    ctx.guard.require_open(case, "judge")
    judge = await ctx.guard.require_user(request.judge_id, UserRole.JUDGE)

    updated = case.model_copy(update={"judge_id": judge.id, "updated_at": ctx.clock.now()})
    await commit(ctx, Collection.CASES, updated)

    logger.info(f"[cases] Assigned judge {judge.id} to case {case_id}")
    return JudgeAssignmentData(
        case=updated,
        modified_at=updated.updated_at,
        judge=UserOut.model_validate(judge),
    )


async def assign_lawyers(ctx: ServiceContext, case_id: str, request: LawyerAssignment) -> LawyerAssignmentData:
    """Replace the case's lawyers. One bad id rejects the whole list."""
    rules.require_fields(ctx.payload(request), ("lawyerIds",))
    lawyer_ids = _ensure_id_list(request.lawyer_ids)
    if not lawyer_ids:
        raise InvalidFormat("Empty lawyerIds array: At least one lawyer ID must be provided")

    case = await ctx.guard.require_case(case_id)
    ctx.guard.require_open(case, "lawyers")
    valid_ids = await ctx.guard.require_valid_ids(lawyer_ids, UserRole.LAWYER, "lawyerIds")

    updated = case.model_copy(update={"lawyer_ids": valid_ids, "updated_at": ctx.clock.now()})
    await commit(ctx, Collection.CASES, updated)

    logger.info(f"[cases] Assigned {len(valid_ids)} lawyer(s) to case {case_id}")
    return LawyerAssignmentData(
        case=updated,
        modified_at=updated.updated_at,
        lawyers=LawyerSummary(total=len(valid_ids), ids=valid_ids),
    )


__all__ = [
    "create_case",
    "list_cases",
    "get_case",
    "update_case_status",
    "assign_judge",
    "assign_lawyers",
]
