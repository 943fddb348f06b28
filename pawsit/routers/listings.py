# pawsit/routers/listings.py
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from ..schemas.dog import DogSize
from ..schemas.listing import ListingCreate, ListingOut, ListingSearch, ListingUpdate, ServiceType
from ..services import listings as listing_service
from ..store import MongoStore, get_store

router = APIRouter()


@router.get("/search", response_model=List[ListingOut])
async def search_listings(
    store: MongoStore = Depends(get_store),
    location: Optional[str] = Query(None),
    radius_km: Optional[float] = Query(None, gt=0),
    service_type: Optional[ServiceType] = Query(None),
    dog_size: Optional[DogSize] = Query(None),
    max_price_per_hour: Optional[float] = Query(None, gt=0),
    has_yard: Optional[bool] = Query(None),
    has_insurance: Optional[bool] = Query(None),
    min_experience_years: Optional[int] = Query(None, ge=0),
):
    filters = ListingSearch(
        location=location,
        radius_km=radius_km,
        service_type=service_type,
        dog_size=dog_size,
        max_price_per_hour=max_price_per_hour,
        has_yard=has_yard,
        has_insurance=has_insurance,
        min_experience_years=min_experience_years,
    )
    return await listing_service.search_listings(store, filters)


@router.get("", response_model=List[ListingOut])
async def list_listings(sitter_id: str = Query(...), store: MongoStore = Depends(get_store)):
    return await listing_service.list_listings_by_sitter(store, sitter_id)


@router.post("", response_model=ListingOut, status_code=status.HTTP_201_CREATED)
async def create_listing(payload: ListingCreate, store: MongoStore = Depends(get_store)):
    return await listing_service.create_listing(store, payload)


@router.patch("/{listing_id}", response_model=ListingOut)
async def update_listing(listing_id: str, payload: ListingUpdate, store: MongoStore = Depends(get_store)):
    return await listing_service.update_listing(store, listing_id, payload)
