import logging
from typing import Any, Dict

from passlib.context import CryptContext

from ..errors import EmailAlreadyRegistered, UserNotFound
from ..schemas.user import UserCreate, UserUpdate
from ..store import MongoStore
from ..utils import utcnow

logger = logging.getLogger(__name__)

pwd = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    return pwd.hash(plain)


def public_user(doc: Dict[str, Any]) -> Dict[str, Any]:
    d = dict(doc)
    d.pop("password_hash", None)
    return d


async def create_user(store: MongoStore, payload: UserCreate) -> Dict[str, Any]:
    if await store.find_user_by_email(payload.email):
        raise EmailAlreadyRegistered()

    doc = payload.model_dump(mode="json")
    doc["password_hash"] = hash_password(doc.pop("password"))
    doc["profile_image_url"] = None
    now = utcnow()
    doc["created_at"] = now
    doc["updated_at"] = now

    created = await store.insert_user(doc)
    logger.info(f"Usuario {created['id']} creado con rol {doc['role']}")
    return public_user(created)


async def get_user(store: MongoStore, user_id: str) -> Dict[str, Any]:
    user = await store.find_user_by_id(user_id)
    if user is None:
        raise UserNotFound()
    return public_user(user)


async def update_user(store: MongoStore, user_id: str, payload: UserUpdate) -> Dict[str, Any]:
    updates = payload.model_dump(exclude_unset=True)
    updates["updated_at"] = utcnow()
    updated = await store.update_user(user_id, updates)
    if updated is None:
        raise UserNotFound()
    return public_user(updated)
