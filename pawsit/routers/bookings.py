# pawsit/routers/bookings.py
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from typing import List, Optional

from ..config import get_settings
from ..middleware.rate_limit import apply_rate_limit
from ..schemas.booking import BookingCreate, BookingOut, StatusPatch
from ..services import bookings as booking_service
from ..services.lifecycle import UNSET, update_status
from ..store import MongoStore, get_store

router = APIRouter()
settings = get_settings()


@router.post("", response_model=BookingOut, status_code=status.HTTP_201_CREATED)
async def create_booking(
    request: Request,
    payload: BookingCreate,
    store: MongoStore = Depends(get_store),
):
    apply_rate_limit(request, settings.rate_limit_bookings, "bookings")
    return await booking_service.create_booking(
        store,
        owner_id=payload.owner_id,
        sitter_id=payload.sitter_id,
        dog_id=payload.dog_id,
        listing_id=payload.listing_id,
        service_type=payload.service_type,
        start_date=payload.start_date,
        end_date=payload.end_date,
        special_requests=payload.special_requests,
    )


@router.get("", response_model=List[BookingOut])
async def list_bookings(
    owner_id: Optional[str] = Query(None),
    sitter_id: Optional[str] = Query(None),
    store: MongoStore = Depends(get_store),
):
    if bool(owner_id) == bool(sitter_id):
        raise HTTPException(400, "Indica owner_id o sitter_id")
    if owner_id:
        return await booking_service.list_bookings_by_owner(store, owner_id)
    return await booking_service.list_bookings_by_sitter(store, sitter_id)


@router.get("/{booking_id}", response_model=BookingOut)
async def get_booking(booking_id: str, store: MongoStore = Depends(get_store)):
    return await booking_service.get_booking(store, booking_id)


@router.patch("/{booking_id}/status", response_model=BookingOut)
async def patch_status(
    body: StatusPatch,
    booking_id: str,
    store: MongoStore = Depends(get_store),
):
    notes = body.notes if "notes" in body.model_fields_set else UNSET
    return await update_status(
        store,
        booking_id,
        body.status,
        notes=notes,
        actor_id=body.actor_id,
        enforce=settings.enforce_status_transitions,
    )
