import logging
from typing import Any, Dict, Optional

from ..errors import (
    BookingNotCompleted,
    BookingNotFound,
    DuplicateReview,
    InvalidReviewee,
    RevieweeNotFound,
    ReviewerNotFound,
    ReviewerNotParticipant,
)
from ..store import MongoStore
from ..utils import utcnow
from .lifecycle import is_reviewable, other_participant, participant_role

logger = logging.getLogger(__name__)


async def authorize_review(store: MongoStore, booking_id: str, reviewer_id: str, reviewee_id: str) -> Dict[str, Any]:
    """
    Una reseña por (reserva, autor), solo sobre reservas completadas y siempre
    hacia el otro participante. Ambos participantes pueden reseñarse.
    """
    booking = await store.find_booking_by_id(booking_id)
    if booking is None:
        raise BookingNotFound()
    if not is_reviewable(booking):
        raise BookingNotCompleted(
            f"La reserva debe estar completada. Estado actual: {booking.get('status')}"
        )

    if await store.find_user_by_id(reviewer_id) is None:
        raise ReviewerNotFound()
    if await store.find_user_by_id(reviewee_id) is None:
        raise RevieweeNotFound()

    role = participant_role(booking, reviewer_id)
    if role is None:
        raise ReviewerNotParticipant()
    if reviewee_id != other_participant(booking, role):
        raise InvalidReviewee()

    if await store.find_reviews_by_booking_and_reviewer(booking_id, reviewer_id):
        raise DuplicateReview()
    return booking


async def create_review(
    store: MongoStore,
    booking_id: str,
    reviewer_id: str,
    reviewee_id: str,
    rating: int,
    comment: Optional[str] = None,
) -> Dict[str, Any]:
    try:
        await authorize_review(store, booking_id, reviewer_id, reviewee_id)
        created = await store.insert_review({
            "booking_id": booking_id,
            "reviewer_id": reviewer_id,
            "reviewee_id": reviewee_id,
            "rating": int(rating),
            "comment": comment,
            "created_at": utcnow(),
        })
    except DuplicateReview:
        logger.warning(f"Reseña duplicada de {reviewer_id} en la reserva {booking_id}")
        raise
    logger.info(f"Reseña {created['id']} de {reviewer_id} a {reviewee_id}")
    return created


async def list_reviews_for_user(store: MongoStore, user_id: str) -> list[Dict[str, Any]]:
    """Reseñas recibidas por el usuario, más recientes primero, con datos del autor."""
    reviews = await store.find_reviews({"reviewee_id": user_id})
    authors = await store.find_users_by_ids(list({r["reviewer_id"] for r in reviews}))
    by_id = {a["id"]: a for a in authors}

    out = []
    for r in reviews:
        author = by_id.get(r["reviewer_id"])
        # Igual que un inner join: sin autor no se lista
        if author is None:
            continue
        r["reviewer"] = {
            "id": author["id"],
            "first_name": author.get("first_name"),
            "last_name": author.get("last_name"),
            "profile_image_url": author.get("profile_image_url"),
        }
        out.append(r)
    return out
