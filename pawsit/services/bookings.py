import logging
from datetime import datetime
from typing import Any, Dict, Optional

from ..errors import BookingNotFound
from ..schemas.booking import BookingStatus
from ..store import MongoStore
from ..utils import as_utc, quantize_money, to_decimal128, utcnow
from .booking_validator import validate_booking_request
from .pricing import RateCard, compute_pricing

logger = logging.getLogger(__name__)


async def create_booking(
    store: MongoStore,
    owner_id: str,
    sitter_id: str,
    dog_id: str,
    listing_id: str,
    service_type: Any,
    start_date: datetime,
    end_date: datetime,
    special_requests: Optional[str] = None,
) -> Dict[str, Any]:
    """Validación -> precio -> alta en estado pending."""
    parties = await validate_booking_request(store, owner_id, sitter_id, dog_id, listing_id)
    pricing = compute_pricing(service_type, start_date, end_date, RateCard.from_listing(parties.listing))

    now = utcnow()
    doc = {
        "owner_id": owner_id,
        "sitter_id": sitter_id,
        "dog_id": dog_id,
        "listing_id": listing_id,
        "service_type": getattr(service_type, "value", service_type),
        "start_date": as_utc(start_date),
        "end_date": as_utc(end_date),
        "total_hours": to_decimal128(quantize_money(pricing.hours)) if pricing.hours is not None else None,
        "total_days": pricing.days,
        "total_price": to_decimal128(quantize_money(pricing.price)),
        "status": BookingStatus.pending.value,
        "special_requests": special_requests,
        "notes": None,
        "created_at": now,
        "updated_at": now,
    }
    created = await store.insert_booking(doc)
    logger.info(f"Reserva {created['id']} creada: {doc['service_type']} total={created['total_price']}")
    return created


async def get_booking(store: MongoStore, booking_id: str) -> Dict[str, Any]:
    booking = await store.find_booking_by_id(booking_id)
    if booking is None:
        raise BookingNotFound()
    return booking


async def list_bookings_by_owner(store: MongoStore, owner_id: str) -> list[Dict[str, Any]]:
    return await store.find_bookings({"owner_id": owner_id})


async def list_bookings_by_sitter(store: MongoStore, sitter_id: str) -> list[Dict[str, Any]]:
    return await store.find_bookings({"sitter_id": sitter_id})
