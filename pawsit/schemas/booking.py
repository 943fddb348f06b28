from pydantic import BaseModel
from enum import Enum
from datetime import datetime
from typing import Optional

from .common import Money
from .listing import ServiceType


class BookingStatus(str, Enum):
    pending   = "pending"
    accepted  = "accepted"
    rejected  = "rejected"
    completed = "completed"
    cancelled = "cancelled"


class BookingCreate(BaseModel):
    owner_id: str
    sitter_id: str
    dog_id: str
    listing_id: str
    service_type: ServiceType
    start_date: datetime
    end_date: datetime
    special_requests: Optional[str] = None


class BookingOut(BaseModel):
    id: str
    owner_id: str
    sitter_id: str
    dog_id: str
    listing_id: str
    service_type: ServiceType
    start_date: datetime
    end_date: datetime
    total_hours: Optional[Money] = None
    total_days: Optional[int] = None
    total_price: Money
    status: BookingStatus
    special_requests: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class StatusPatch(BaseModel):
    status: BookingStatus
    # Omitir notes conserva las existentes; notes=null las borra
    notes: Optional[str] = None
    # Solo se exige con ENFORCE_STATUS_TRANSITIONS
    actor_id: Optional[str] = None
