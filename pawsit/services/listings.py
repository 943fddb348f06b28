import logging
from typing import Any, Dict

from ..errors import ListingNotFound, NotASitter, UserNotFound
from ..schemas.listing import ListingCreate, ListingSearch, ListingUpdate
from ..schemas.user import SITTER_ROLES, UserRole
from ..store import MongoStore
from ..utils import to_decimal, to_decimal128, utcnow

logger = logging.getLogger(__name__)

PRICE_FIELDS = ("price_per_hour", "price_per_day", "price_per_night")


def _with_decimal128(data: Dict[str, Any]) -> Dict[str, Any]:
    for k in PRICE_FIELDS:
        if k in data:
            data[k] = to_decimal128(data[k])
    return data


async def create_listing(store: MongoStore, payload: ListingCreate) -> Dict[str, Any]:
    user = await store.find_user_by_id(payload.sitter_id)
    if user is None:
        raise UserNotFound()
    if UserRole(user["role"]) not in SITTER_ROLES:
        raise NotASitter()

    doc = _with_decimal128(payload.model_dump(mode="python"))
    doc["services_offered"] = [s.value for s in payload.services_offered]
    doc["accepts_sizes"] = [s.value for s in payload.accepts_sizes]
    now = utcnow()
    doc.update({"is_active": True, "created_at": now, "updated_at": now})

    created = await store.insert_listing(doc)
    logger.info(f"Anuncio {created['id']} creado por {payload.sitter_id}")
    return created


async def list_listings_by_sitter(store: MongoStore, sitter_id: str) -> list[Dict[str, Any]]:
    # Activos e inactivos: es la vista del propio cuidador
    return await store.find_listings({"sitter_id": sitter_id})


async def update_listing(store: MongoStore, listing_id: str, payload: ListingUpdate) -> Dict[str, Any]:
    updates = _with_decimal128(payload.model_dump(mode="python", exclude_unset=True))
    for k in ("services_offered", "accepts_sizes"):
        if updates.get(k) is not None:
            updates[k] = [v.value for v in updates[k]]
    updates["updated_at"] = utcnow()
    updated = await store.update_listing(listing_id, updates)
    if updated is None:
        raise ListingNotFound()
    return updated


async def search_listings(store: MongoStore, filters: ListingSearch) -> list[Dict[str, Any]]:
    """
    Búsqueda de anuncios activos. El radio es un umbral sobre el radio de
    servicio del anuncio, no una distancia geográfica.
    """
    q: Dict[str, Any] = {"is_active": True}
    if filters.location:
        q["location"] = filters.location
    if filters.radius_km is not None:
        q["radius_km"] = {"$gte": filters.radius_km}
    if filters.service_type is not None:
        q["services_offered"] = filters.service_type.value
    if filters.dog_size is not None:
        q["accepts_sizes"] = filters.dog_size.value
    if filters.has_yard is not None:
        q["has_yard"] = filters.has_yard
    if filters.has_insurance is not None:
        q["has_insurance"] = filters.has_insurance
    if filters.min_experience_years is not None:
        q["experience_years"] = {"$gte": filters.min_experience_years}

    listings = await store.find_listings(q)

    # price_per_hour es Decimal128: el tope de precio se filtra en Python
    if filters.max_price_per_hour is not None:
        listings = [l for l in listings if to_decimal(l["price_per_hour"]) <= filters.max_price_per_hour]
    return listings
