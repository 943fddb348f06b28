import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict

from ..errors import (
    DogNotFound,
    DogOwnershipMismatch,
    ListingNotFound,
    ListingOwnershipMismatch,
    OwnerNotFound,
    SitterNotFound,
)
from ..store import MongoStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookingParties:
    owner: Dict[str, Any]
    sitter: Dict[str, Any]
    dog: Dict[str, Any]
    listing: Dict[str, Any]


async def validate_booking_request(
    store: MongoStore, owner_id: str, sitter_id: str, dog_id: str, listing_id: str
) -> BookingParties:
    """
    Comprueba que las cuatro entidades existen y encajan entre sí.

    Las búsquedas van en paralelo; las comprobaciones se hacen en orden fijo
    (existencia antes que pertenencia) y la primera que falla gana.
    """
    owner, sitter, dog, listing = await asyncio.gather(
        store.find_user_by_id(owner_id),
        store.find_user_by_id(sitter_id),
        store.find_dog_by_id(dog_id),
        store.find_listing_by_id(listing_id),
    )

    if owner is None:
        raise OwnerNotFound()
    if sitter is None:
        raise SitterNotFound()
    if dog is None:
        raise DogNotFound()
    if listing is None:
        raise ListingNotFound()

    if str(dog.get("owner_id")) != owner_id:
        logger.warning(f"Perro {dog_id} no pertenece al dueño {owner_id}")
        raise DogOwnershipMismatch()
    if str(listing.get("sitter_id")) != sitter_id:
        logger.warning(f"Anuncio {listing_id} no pertenece al cuidador {sitter_id}")
        raise ListingOwnershipMismatch()

    return BookingParties(owner=owner, sitter=sitter, dog=dog, listing=listing)
