from fastapi import APIRouter, Depends, Query, Request, status
from typing import List

from ..config import get_settings
from ..middleware.rate_limit import apply_rate_limit
from ..schemas.review import ReviewCreate, ReviewOut, ReviewWithReviewer
from ..services import reviews as review_service
from ..store import MongoStore, get_store

router = APIRouter()
settings = get_settings()


@router.get("", response_model=List[ReviewWithReviewer])
async def list_reviews(
    user_id: str = Query(..., description="Usuario reseñado"),
    store: MongoStore = Depends(get_store),
):
    return await review_service.list_reviews_for_user(store, user_id)


@router.post("", response_model=ReviewOut, status_code=status.HTTP_201_CREATED)
async def create_review(
    request: Request,
    payload: ReviewCreate,
    store: MongoStore = Depends(get_store),
):
    apply_rate_limit(request, settings.rate_limit_reviews, "reviews")
    return await review_service.create_review(
        store,
        booking_id=payload.booking_id,
        reviewer_id=payload.reviewer_id,
        reviewee_id=payload.reviewee_id,
        rating=payload.rating,
        comment=payload.comment,
    )
