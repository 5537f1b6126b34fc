"""Response payloads returned by the API."""

from datetime import datetime
from typing import List, Optional

from docket.schemas.entities import CamelModel, Case, Hearing, UserRole


class UserOut(CamelModel):
    """User as exposed over the API; the stored password never leaves the service."""
    id: str
    username: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: Optional[datetime] = None


class CaseWithHearings(Case):
    hearings: List[Hearing] = []


class CaseStatistics(CamelModel):
    total: int = 0
    open_cases: int = 0
    closed_cases: int = 0


class LawyerSummary(CamelModel):
    total: int
    ids: List[str]


class MessageResponse(CamelModel):
    message: str


class UserResponse(MessageResponse):
    user: UserOut


class UserListResponse(MessageResponse):
    users: List[UserOut]


class CaseResponse(MessageResponse):
    case: Case


class CaseListResponse(MessageResponse):
    cases: List[Case]


class HearingResponse(MessageResponse):
    hearing: Hearing


class HearingListResponse(MessageResponse):
    hearings: List[Hearing]


class JudgeAssignmentData(CamelModel):
    case: Case
    modified_at: Optional[datetime] = None
    judge: UserOut


class JudgeAssignmentResponse(MessageResponse):
    status: int = 200
    data: JudgeAssignmentData


class LawyerAssignmentData(CamelModel):
    case: Case
    modified_at: Optional[datetime] = None
    lawyers: LawyerSummary


class LawyerAssignmentResponse(MessageResponse):
    status: int = 200
    data: LawyerAssignmentData


class JudgeCaseloadResponse(MessageResponse):
    status: int = 200
    cases: List[CaseWithHearings]
    statistics: CaseStatistics
    hearings: List[Hearing] = []
