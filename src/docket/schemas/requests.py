"""Request payloads.

Every field is optional at the schema level so that absent values reach the
validation rules and are reported as ``MissingField`` instead of a generic
schema error.
"""

from datetime import datetime
from typing import Any, Optional

from docket.schemas.entities import CamelModel


class UserCreate(CamelModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class UserUpdate(CamelModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class CaseCreate(CamelModel):
    case_number: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    judge_id: Optional[str] = None
    lawyer_ids: Optional[Any] = None


class CaseStatusUpdate(CamelModel):
    status: Optional[str] = None


class JudgeAssignment(CamelModel):
    judge_id: Optional[str] = None


class LawyerAssignment(CamelModel):
    lawyer_ids: Optional[Any] = None


class HearingCreate(CamelModel):
    case_id: Optional[str] = None
    judge_id: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None
    description: Optional[str] = None
