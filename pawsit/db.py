from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from .config import get_settings

_settings = get_settings()
_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    await db.users.create_index("email", unique=True)
    await db.dogs.create_index([("owner_id", 1), ("is_active", 1)])
    await db.listings.create_index([("sitter_id", 1)])
    await db.listings.create_index([("is_active", 1), ("location", 1)])
    await db.bookings.create_index([("owner_id", 1)])
    await db.bookings.create_index([("sitter_id", 1)])
    await db.messages.create_index([("booking_id", 1), ("created_at", 1)])
    await db.reviews.create_index([("reviewee_id", 1), ("created_at", -1)])
    # Una sola reseña por (reserva, autor): cierra la carrera check-then-insert
    await db.reviews.create_index([("booking_id", 1), ("reviewer_id", 1)], unique=True)


async def get_db() -> AsyncIOMotorDatabase:
    global _client, _db
    if _db is None:
        _client = AsyncIOMotorClient(_settings.mongodb_uri, tz_aware=True)
        _db = _client[_settings.db_name]
        await ensure_indexes(_db)
    return _db
