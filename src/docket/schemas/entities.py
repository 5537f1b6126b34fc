"""Domain records stored in the entity collections."""

from datetime import datetime
from typing import List, Optional, Union
import enum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from docket.utils.clock import as_utc


class UserRole(str, enum.Enum):
    JUDGE = "Judge"
    LAWYER = "Lawyer"
    COURT_STAFF = "CourtStaff"
    LITIGANT = "Litigant"


class CaseStatus(str, enum.Enum):
    """Status values the engine reacts to. Any other string is a valid status too."""
    OPEN = "Open"
    CLOSED = "Closed"

    @classmethod
    def recognize(cls, value: str) -> Union["CaseStatus", str]:
        """Return the matching member, or ``value`` unchanged when it is free text."""
        try:
            return cls(value)
        except ValueError:
            return value


class CamelModel(BaseModel):
    """Base for every record and payload: camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Record(CamelModel):
    id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at", mode="after")
    @classmethod
    def _to_utc(cls, value):
        return as_utc(value) if value is not None else None


class UserProfile(Record):
    username: str
    email: str
    password: str
    role: UserRole


class Case(Record):
    case_number: str
    title: str
    description: str
    status: str = CaseStatus.OPEN.value
    judge_id: Optional[str] = None
    lawyer_ids: List[str] = []

    @field_validator("status", mode="before")
    @classmethod
    def _status_text(cls, value):
        if isinstance(value, CaseStatus):
            return value.value
        return value

    @property
    def status_tag(self) -> Union[CaseStatus, str]:
        return CaseStatus.recognize(self.status)

    @property
    def is_closed(self) -> bool:
        return self.status == CaseStatus.CLOSED.value


class Hearing(Record):
    case_id: str
    judge_id: str
    date: datetime
    location: str
    description: str

    @field_validator("date", mode="after")
    @classmethod
    def _date_to_utc(cls, value):
        return as_utc(value)
