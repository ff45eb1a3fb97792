from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import Column, Integer, DateTime, String
from sqlalchemy import Enum as SQLEnum

from enums.user_role import UserRole
from models.base import Base


# Rows are provisioned by the auth gateway; the store only reads them
# for ownership checks and admin listings.
class User(Base):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    email = Column(String(255), nullable=False, unique=True)
    name = Column(String(255), nullable=False)
    role = Column(SQLEnum(UserRole), nullable=False, default=UserRole.USER)
    created_at = Column(DateTime, nullable=False, default=datetime.now)


class UserDTO(BaseModel):
    id: int | None = None
    email: str | None = None
    name: str | None = None
    role: UserRole | None = None
    created_at: datetime | None = None


class UserSummaryDTO(BaseModel):
    id: int
    email: str
    name: str
