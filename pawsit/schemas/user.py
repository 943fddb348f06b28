from pydantic import BaseModel, EmailStr, Field, field_validator
from enum import Enum
from datetime import datetime
from typing import Optional

from .common import reject_null


class UserRole(str, Enum):
    owner  = "owner"
    sitter = "sitter"
    both   = "both"


SITTER_ROLES = {UserRole.sitter, UserRole.both}


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    role: UserRole
    location: Optional[str] = None
    bio: Optional[str] = None


class UserUpdate(BaseModel):
    """Solo los campos enviados se modifican; null borra el valor de los opcionales."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    profile_image_url: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class UserOut(BaseModel):
    id: str
    email: EmailStr
    first_name: str
    last_name: str
    phone: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRole
    location: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ReviewerSummary(BaseModel):
    id: str
    first_name: str
    last_name: str
    profile_image_url: Optional[str] = None
