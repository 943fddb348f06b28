from pydantic import BaseModel, Field, field_validator
from enum import Enum
from datetime import datetime
from typing import Optional, List

from .common import Money, reject_null
from .dog import DogSize


class ServiceType(str, Enum):
    dog_walking    = "dog_walking"
    pet_sitting    = "pet_sitting"
    daycare        = "daycare"
    overnight_care = "overnight_care"
    grooming       = "grooming"


class ListingCreate(BaseModel):
    sitter_id: str
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=10)
    services_offered: List[ServiceType] = Field(..., min_length=1)
    price_per_hour: Money = Field(..., gt=0)
    price_per_day: Optional[Money] = Field(None, gt=0)
    price_per_night: Optional[Money] = Field(None, gt=0)
    max_dogs: int = Field(..., ge=1)
    accepts_sizes: List[DogSize] = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    radius_km: float = Field(..., gt=0)
    experience_years: int = Field(..., ge=0)
    has_yard: bool = False
    has_insurance: bool = False
    emergency_contact: Optional[str] = None


class ListingUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    services_offered: Optional[List[ServiceType]] = Field(None, min_length=1)
    price_per_hour: Optional[Money] = Field(None, gt=0)
    price_per_day: Optional[Money] = Field(None, gt=0)
    price_per_night: Optional[Money] = Field(None, gt=0)
    max_dogs: Optional[int] = Field(None, ge=1)
    accepts_sizes: Optional[List[DogSize]] = Field(None, min_length=1)
    location: Optional[str] = None
    radius_km: Optional[float] = Field(None, gt=0)
    experience_years: Optional[int] = Field(None, ge=0)
    has_yard: Optional[bool] = None
    has_insurance: Optional[bool] = None
    emergency_contact: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator(
        "title", "description", "services_offered", "price_per_hour", "max_dogs", "accepts_sizes",
        "location", "radius_km", "experience_years", "has_yard", "has_insurance", "is_active",
        mode="before",
    )
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class ListingOut(BaseModel):
    id: str
    sitter_id: str
    title: str
    description: str
    services_offered: List[ServiceType]
    price_per_hour: Money
    price_per_day: Optional[Money] = None
    price_per_night: Optional[Money] = None
    max_dogs: int
    accepts_sizes: List[DogSize]
    location: str
    radius_km: float
    experience_years: int
    has_yard: bool
    has_insurance: bool
    emergency_contact: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ListingSearch(BaseModel):
    location: Optional[str] = None
    radius_km: Optional[float] = Field(None, gt=0)
    service_type: Optional[ServiceType] = None
    dog_size: Optional[DogSize] = None
    max_price_per_hour: Optional[Money] = Field(None, gt=0)
    has_yard: Optional[bool] = None
    has_insurance: Optional[bool] = None
    min_experience_years: Optional[int] = Field(None, ge=0)
