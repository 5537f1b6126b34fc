from sqlalchemy import Column, String, Text, JSON
from docket.models.base import Base, TimestampMixin

class Case(Base, TimestampMixin):
    __tablename__ = "cases"

    id = Column(String, primary_key=True)
    case_number = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    status = Column(String, default="Open", nullable=False, index=True)

    # Weak references, resolved by lookup only
    judge_id = Column(String, nullable=True, index=True)
    lawyer_ids = Column(JSON, default=list, nullable=False)
