from sqlalchemy import Column, String, Text, DateTime
from docket.models.base import Base, TimestampMixin

class Hearing(Base, TimestampMixin):
    __tablename__ = "hearings"

    id = Column(String, primary_key=True)
    case_id = Column(String, nullable=False, index=True)
    judge_id = Column(String, nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    location = Column(String, nullable=False)
    description = Column(Text, nullable=False)
