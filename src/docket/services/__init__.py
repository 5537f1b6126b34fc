from docket.services.base import ServiceContext, commit
from docket.services import users, cases, hearings, caseloads

__all__ = [
    "ServiceContext",
    "commit",
    "users",
    "cases",
    "hearings",
    "caseloads",
]
