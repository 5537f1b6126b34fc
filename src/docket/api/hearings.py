from fastapi import APIRouter, Body, Depends, status

from docket.api.deps import get_context
from docket.schemas import HearingCreate, HearingListResponse, HearingResponse
from docket.services import ServiceContext
from docket.services import hearings as hearing_service

router = APIRouter(prefix="/hearings", tags=["hearings"])

@router.post("", response_model=HearingResponse, status_code=status.HTTP_201_CREATED)
async def create_hearing(
    payload: HearingCreate = Body(default_factory=HearingCreate),
    ctx: ServiceContext = Depends(get_context),
):
    """Schedule a hearing"""
    hearing = await hearing_service.create_hearing(ctx, payload)
    return HearingResponse(message="Hearing scheduled successfully.", hearing=hearing)

@router.get("", response_model=HearingListResponse)
async def list_hearings(ctx: ServiceContext = Depends(get_context)):
    """List all hearings"""
    hearings = await hearing_service.list_hearings(ctx)
    message = "Hearings retrieved successfully." if hearings else "No hearings found."
    return HearingListResponse(message=message, hearings=hearings)

@router.get("/{hearing_id}", response_model=HearingResponse)
async def get_hearing(
    hearing_id: str,
    ctx: ServiceContext = Depends(get_context),
):
    """Get hearing details"""
    hearing = await hearing_service.get_hearing(ctx, hearing_id)
    return HearingResponse(message="Hearing retrieved successfully.", hearing=hearing)
