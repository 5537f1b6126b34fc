from sqlalchemy import Column, String, Enum
from docket.models.base import Base, TimestampMixin
from docket.schemas.entities import UserRole

class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    role = Column(Enum(UserRole), nullable=False, index=True)
