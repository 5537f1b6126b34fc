from fastapi import APIRouter, Body, Depends, status

from docket.api.deps import get_context
from docket.schemas import (
    CaseCreate,
    CaseListResponse,
    CaseResponse,
    CaseStatusUpdate,
    JudgeAssignment,
    JudgeAssignmentResponse,
    LawyerAssignment,
    LawyerAssignmentResponse,
)
from docket.services import ServiceContext
from docket.services import cases as case_service

router = APIRouter(prefix="/cases", tags=["cases"])

@router.post("", response_model=CaseResponse, status_code=status.HTTP_201_CREATED)
async def create_case(
    payload: CaseCreate = Body(default_factory=CaseCreate),
    ctx: ServiceContext = Depends(get_context),
):
    """Create a new case"""
    case = await case_service.create_case(ctx, payload)
    return CaseResponse(message="Case created successfully.", case=case)

@router.get("", response_model=CaseListResponse)
async def list_cases(ctx: ServiceContext = Depends(get_context)):
    """List all cases"""
    cases = await case_service.list_cases(ctx)
    message = "Cases retrieved successfully." if cases else "No cases found."
    return CaseListResponse(message=message, cases=cases)

@router.put("/{case_id}/status", response_model=CaseResponse)
async def update_case_status(
    case_id: str,
    payload: CaseStatusUpdate = Body(default_factory=CaseStatusUpdate),
    ctx: ServiceContext = Depends(get_context),
):
    """Set case status"""
    case = await case_service.update_case_status(ctx, case_id, payload)
    return CaseResponse(message="Case status updated successfully.", case=case)

@router.get("/{case_id}", response_model=CaseResponse)
async def get_case(
    case_id: str,
    ctx: ServiceContext = Depends(get_context),
):
    """Get case details"""
    case = await case_service.get_case(ctx, case_id)
    return CaseResponse(message="Case retrieved successfully.", case=case)

@router.put("/{case_id}/judge", response_model=JudgeAssignmentResponse)
async def assign_judge(
    case_id: str,
    payload: JudgeAssignment = Body(default_factory=JudgeAssignment),
    ctx: ServiceContext = Depends(get_context),
):
    """Assign a judge to an open case"""
    data = await case_service.assign_judge(ctx, case_id, payload)
    return JudgeAssignmentResponse(message="Judge successfully assigned to case", data=data)

@router.put("/{case_id}/lawyers", response_model=LawyerAssignmentResponse)
async def assign_lawyers(
    case_id: str,
    payload: LawyerAssignment = Body(default_factory=LawyerAssignment),
    ctx: ServiceContext = Depends(get_context),
):
    """Replace the lawyers of an open case"""
    data = await case_service.assign_lawyers(ctx, case_id, payload)
    return LawyerAssignmentResponse(message="Lawyers successfully assigned to case", data=data)
