from fastapi import APIRouter, Depends

from docket.api.deps import get_context
from docket.schemas import HearingListResponse, JudgeCaseloadResponse
from docket.services import ServiceContext
from docket.services import caseloads

router = APIRouter(prefix="/judges", tags=["judges"])

@router.get("/{judge_id}/cases", response_model=JudgeCaseloadResponse)
async def judge_cases(
    judge_id: str,
    ctx: ServiceContext = Depends(get_context),
):
    """Cases assigned to a judge, with hearings and statistics"""
    caseload = await caseloads.judge_cases(ctx, judge_id)
    message = "Cases retrieved successfully" if caseload.cases else "No cases found for the judge"
    return JudgeCaseloadResponse(
        message=message,
        cases=caseload.cases,
        statistics=caseload.statistics,
        hearings=[h for case in caseload.cases for h in case.hearings],
    )

@router.get("/{judge_id}/hearings", response_model=HearingListResponse)
async def judge_hearings(
    judge_id: str,
    ctx: ServiceContext = Depends(get_context),
):
    """All hearings presided by a judge"""
    hearings = await caseloads.judge_hearings(ctx, judge_id)
    message = "Hearings retrieved successfully." if hearings else "No hearings found for the judge."
    return HearingListResponse(message=message, hearings=hearings)

@router.get("/{judge_id}/upcoming-hearings", response_model=HearingListResponse)
async def judge_upcoming_hearings(
    judge_id: str,
    ctx: ServiceContext = Depends(get_context),
):
    """Future hearings of a judge, earliest first"""
    hearings = await caseloads.judge_upcoming_hearings(ctx, judge_id)
    return HearingListResponse(message="Upcoming hearings retrieved successfully", hearings=hearings)
