from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from .user import ReviewerSummary


class ReviewCreate(BaseModel):
    booking_id: str
    reviewer_id: str
    reviewee_id: str
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class ReviewOut(BaseModel):
    id: str
    booking_id: str
    reviewer_id: str
    reviewee_id: str
    rating: int
    comment: Optional[str] = None
    created_at: datetime


class ReviewWithReviewer(ReviewOut):
    reviewer: Optional[ReviewerSummary] = None
