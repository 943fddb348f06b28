from typing import Any, Dict

from ..errors import DogNotFound, OwnerNotFound
from ..schemas.dog import DogCreate, DogUpdate
from ..store import MongoStore
from ..utils import utcnow


async def create_dog(store: MongoStore, payload: DogCreate) -> Dict[str, Any]:
    if await store.find_user_by_id(payload.owner_id) is None:
        raise OwnerNotFound()
    doc = payload.model_dump(mode="json")
    now = utcnow()
    doc.update({"is_active": True, "created_at": now, "updated_at": now})
    return await store.insert_dog(doc)


async def list_dogs_by_owner(store: MongoStore, owner_id: str) -> list[Dict[str, Any]]:
    # Los perros dados de baja (is_active=False) no se listan
    return await store.find_dogs({"owner_id": owner_id, "is_active": True})


async def update_dog(store: MongoStore, dog_id: str, payload: DogUpdate) -> Dict[str, Any]:
    updates = payload.model_dump(mode="json", exclude_unset=True)
    updates["updated_at"] = utcnow()
    updated = await store.update_dog(dog_id, updates)
    if updated is None:
        raise DogNotFound()
    return updated
