# pawsit/routers/users.py
from fastapi import APIRouter, Depends, status

from ..schemas.user import UserCreate, UserOut, UserUpdate
from ..services import accounts
from ..store import MongoStore, get_store

router = APIRouter()


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, store: MongoStore = Depends(get_store)):
    return await accounts.create_user(store, payload)


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str, store: MongoStore = Depends(get_store)):
    return await accounts.get_user(store, user_id)


@router.patch("/{user_id}", response_model=UserOut)
async def update_user(user_id: str, payload: UserUpdate, store: MongoStore = Depends(get_store)):
    return await accounts.update_user(store, user_id, payload)
