from sqlalchemy import Boolean, Column, Integer, String, DateTime
from sqlalchemy.sql import func
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from .base import Base

# SQLAlchemy Models
class User(Base):
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    name = Column(String, nullable=False)
    display_name = Column(String(100))
    role = Column(String(20), default="user", nullable=False)  # user, counselor, admin
    consent_given = Column(Boolean, default=False)
    consent_timestamp = Column(DateTime)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    @property
    def greeting_name(self) -> Optional[str]:
        return self.display_name or self.name

# Pydantic Models
class UserCreate(BaseModel):
    email: str
    password: str
    name: str
    display_name: Optional[str] = None
    consent_given: bool

class UserLogin(BaseModel):
    email: str
    password: str

class UserUpdate(BaseModel):
    name: Optional[str] = None
    display_name: Optional[str] = None

class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    display_name: Optional[str]
    role: str
    consent_given: bool
    consent_timestamp: Optional[datetime]
    created_at: datetime
    
    class Config:
        from_attributes = True

class Token(BaseModel):
    access_token: str
    token_type: str
    user: UserResponse
