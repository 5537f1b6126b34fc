from fastapi import APIRouter, Depends

from docket.api.deps import get_context
from docket.schemas import CaseListResponse
from docket.services import ServiceContext
from docket.services import caseloads

router = APIRouter(prefix="/lawyers", tags=["lawyers"])

@router.get("/{lawyer_id}/cases", response_model=CaseListResponse)
async def lawyer_cases(
    lawyer_id: str,
    ctx: ServiceContext = Depends(get_context),
):
    """Cases a lawyer is assigned to"""
    cases = await caseloads.lawyer_cases(ctx, lawyer_id)
    message = "Cases retrieved successfully" if cases else "No cases found for the lawyer"
    return CaseListResponse(message=message, cases=cases)
