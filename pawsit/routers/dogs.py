from fastapi import APIRouter, Depends, Query, status

from ..schemas.dog import DogCreate, DogOut, DogUpdate
from ..services import dogs as dog_service
from ..store import MongoStore, get_store

router = APIRouter()


@router.get("", response_model=list[DogOut])
async def list_dogs(owner_id: str = Query(...), store: MongoStore = Depends(get_store)):
    return await dog_service.list_dogs_by_owner(store, owner_id)


@router.post("", response_model=DogOut, status_code=status.HTTP_201_CREATED)
async def create_dog(payload: DogCreate, store: MongoStore = Depends(get_store)):
    return await dog_service.create_dog(store, payload)


@router.patch("/{dog_id}", response_model=DogOut)
async def update_dog(dog_id: str, payload: DogUpdate, store: MongoStore = Depends(get_store)):
    return await dog_service.update_dog(store, dog_id, payload)
