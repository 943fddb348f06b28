from pydantic import BaseModel, Field, field_validator
from enum import Enum
from datetime import datetime
from typing import Optional, List

from .common import reject_null


class DogSize(str, Enum):
    small       = "small"
    medium      = "medium"
    large       = "large"
    extra_large = "extra_large"


class DogTemperament(str, Enum):
    calm       = "calm"
    playful    = "playful"
    energetic  = "energetic"
    aggressive = "aggressive"
    anxious    = "anxious"
    friendly   = "friendly"


class DogCreate(BaseModel):
    owner_id: str
    name: str = Field(..., min_length=1)
    breed: Optional[str] = None
    age: int = Field(..., ge=0)
    size: DogSize
    weight: Optional[float] = Field(None, gt=0)
    temperament: List[DogTemperament] = []
    medical_notes: Optional[str] = None
    special_instructions: Optional[str] = None
    profile_image_url: Optional[str] = None


class DogUpdate(BaseModel):
    name: Optional[str] = None
    breed: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    size: Optional[DogSize] = None
    weight: Optional[float] = Field(None, gt=0)
    temperament: Optional[List[DogTemperament]] = None
    medical_notes: Optional[str] = None
    special_instructions: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "age", "size", "temperament", "is_active", mode="before")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class DogOut(BaseModel):
    id: str
    owner_id: str
    name: str
    breed: Optional[str] = None
    age: int
    size: DogSize
    weight: Optional[float] = None
    temperament: List[DogTemperament] = []
    medical_notes: Optional[str] = None
    special_instructions: Optional[str] = None
    profile_image_url: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
