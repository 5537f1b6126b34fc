from docket.models.base import Base, TimestampMixin
from docket.models.user import User
from docket.models.case import Case
from docket.models.hearing import Hearing

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Case",
    "Hearing",
]
