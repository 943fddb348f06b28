"""
Acceso a MongoDB para el núcleo de reservas.

Las búsquedas devuelven ``None`` (o lista vacía) cuando no hay registro, nunca
lanzan: el núcleo traduce la ausencia a su propio error tipado. Los fallos de
conexión se convierten en ``StoreUnavailable`` (reintentable).
"""
from functools import wraps
from typing import Any, Dict, List, Optional
import logging

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure, DuplicateKeyError

from .db import get_db
from .errors import DuplicateReview, EmailAlreadyRegistered, StoreUnavailable
from .utils import maybe_object_id, to_id

logger = logging.getLogger(__name__)


def _store_call(fn):
    @wraps(fn)
    async def wrapper(*args, **kwargs):
        try:
            return await fn(*args, **kwargs)
        except ConnectionFailure as e:
            logger.error(f"MongoDB no disponible en {fn.__name__}: {e}", exc_info=True)
            raise StoreUnavailable() from e
    return wrapper


class MongoStore:
    """Colecciones: users, dogs, listings, bookings, messages, reviews."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    # ---------- helpers ----------

    async def _find_by_id(self, collection: str, value: Any) -> Optional[Dict[str, Any]]:
        oid = maybe_object_id(value)
        if oid is None:
            return None
        doc = await self.db[collection].find_one({"_id": oid})
        return to_id(doc) if doc else None

    async def _insert(self, collection: str, doc: Dict[str, Any]) -> Dict[str, Any]:
        res = await self.db[collection].insert_one(doc)
        created = await self.db[collection].find_one({"_id": res.inserted_id})
        return to_id(created)

    async def _update(self, collection: str, value: Any, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        oid = maybe_object_id(value)
        if oid is None:
            return None
        res = await self.db[collection].update_one({"_id": oid}, {"$set": updates})
        if res.matched_count == 0:
            return None
        return to_id(await self.db[collection].find_one({"_id": oid}))

    async def _find_many(self, collection: str, query: Dict[str, Any], sort: list, limit: int = 500) -> List[Dict[str, Any]]:
        # _id desempata: los ObjectId crecen con el orden de inserción
        order = sort + [("_id", sort[-1][1])]
        docs = await self.db[collection].find(query).sort(order).to_list(limit)
        return [to_id(d) for d in docs]

    # ---------- lookups ----------

    @_store_call
    async def find_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        return await self._find_by_id("users", user_id)

    @_store_call
    async def find_user_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        doc = await self.db.users.find_one({"email": email})
        return to_id(doc) if doc else None

    @_store_call
    async def find_dog_by_id(self, dog_id: str) -> Optional[Dict[str, Any]]:
        return await self._find_by_id("dogs", dog_id)

    @_store_call
    async def find_listing_by_id(self, listing_id: str) -> Optional[Dict[str, Any]]:
        return await self._find_by_id("listings", listing_id)

    @_store_call
    async def find_booking_by_id(self, booking_id: str) -> Optional[Dict[str, Any]]:
        return await self._find_by_id("bookings", booking_id)

    @_store_call
    async def find_message_by_id(self, message_id: str) -> Optional[Dict[str, Any]]:
        return await self._find_by_id("messages", message_id)

    @_store_call
    async def find_reviews_by_booking_and_reviewer(self, booking_id: str, reviewer_id: str) -> List[Dict[str, Any]]:
        return await self._find_many(
            "reviews", {"booking_id": booking_id, "reviewer_id": reviewer_id}, [("created_at", 1)]
        )

    # ---------- listados ----------

    @_store_call
    async def find_dogs(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._find_many("dogs", query, [("created_at", 1)])

    @_store_call
    async def find_listings(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._find_many("listings", query, [("created_at", 1)], limit=1000)

    @_store_call
    async def find_bookings(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._find_many("bookings", query, [("start_date", 1)])

    @_store_call
    async def find_messages(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._find_many("messages", query, [("created_at", 1)], limit=1000)

    @_store_call
    async def find_reviews(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._find_many("reviews", query, [("created_at", -1)])

    @_store_call
    async def find_users_by_ids(self, user_ids: List[str]) -> List[Dict[str, Any]]:
        oids = [oid for oid in (maybe_object_id(u) for u in user_ids) if oid is not None]
        if not oids:
            return []
        docs = await self.db.users.find({"_id": {"$in": oids}}).to_list(len(oids))
        return [to_id(d) for d in docs]

    # ---------- escrituras ----------

    @_store_call
    async def insert_user(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return await self._insert("users", doc)
        except DuplicateKeyError as e:
            # Índice único en email: otra alta simultánea ganó la carrera
            raise EmailAlreadyRegistered() from e

    @_store_call
    async def update_user(self, user_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._update("users", user_id, updates)

    @_store_call
    async def insert_dog(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        return await self._insert("dogs", doc)

    @_store_call
    async def update_dog(self, dog_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._update("dogs", dog_id, updates)

    @_store_call
    async def insert_listing(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        return await self._insert("listings", doc)

    @_store_call
    async def update_listing(self, listing_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._update("listings", listing_id, updates)

    @_store_call
    async def insert_booking(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        return await self._insert("bookings", doc)

    @_store_call
    async def update_booking(self, booking_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._update("bookings", booking_id, updates)

    @_store_call
    async def insert_message(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        return await self._insert("messages", doc)

    @_store_call
    async def mark_message_read(self, message_id: str) -> Optional[Dict[str, Any]]:
        return await self._update("messages", message_id, {"is_read": True})

    @_store_call
    async def insert_review(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        try:
            return await self._insert("reviews", doc)
        except DuplicateKeyError as e:
            # Índice único (booking_id, reviewer_id): otra petición ganó la carrera
            raise DuplicateReview() from e


async def get_store(db: AsyncIOMotorDatabase = Depends(get_db)) -> MongoStore:
    return MongoStore(db)
