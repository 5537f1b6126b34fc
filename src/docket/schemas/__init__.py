from docket.schemas.entities import (
    CamelModel,
    Record,
    UserRole,
    CaseStatus,
    UserProfile,
    Case,
    Hearing,
)
from docket.schemas.requests import (
    UserCreate,
    UserUpdate,
    CaseCreate,
    CaseStatusUpdate,
    JudgeAssignment,
    LawyerAssignment,
    HearingCreate,
)
from docket.schemas.responses import (
    UserOut,
    CaseWithHearings,
    CaseStatistics,
    LawyerSummary,
    MessageResponse,
    UserResponse,
    UserListResponse,
    CaseResponse,
    CaseListResponse,
    HearingResponse,
    HearingListResponse,
    JudgeAssignmentData,
    JudgeAssignmentResponse,
    LawyerAssignmentData,
    LawyerAssignmentResponse,
    JudgeCaseloadResponse,
)

__all__ = [
    "CamelModel",
    "Record",
    "UserRole",
    "CaseStatus",
    "UserProfile",
    "Case",
    "Hearing",
    "UserCreate",
    "UserUpdate",
    "CaseCreate",
    "CaseStatusUpdate",
    "JudgeAssignment",
    "LawyerAssignment",
    "HearingCreate",
    "UserOut",
    "CaseWithHearings",
    "CaseStatistics",
    "LawyerSummary",
    "MessageResponse",
    "UserResponse",
    "UserListResponse",
    "CaseResponse",
    "CaseListResponse",
    "HearingResponse",
    "HearingListResponse",
    "JudgeAssignmentData",
    "JudgeAssignmentResponse",
    "LawyerAssignmentData",
    "LawyerAssignmentResponse",
    "JudgeCaseloadResponse",
]
