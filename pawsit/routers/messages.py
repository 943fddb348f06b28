from fastapi import APIRouter, Depends, Query, Request, status
from typing import List

from ..config import get_settings
from ..middleware.rate_limit import apply_rate_limit
from ..schemas.message import MessageCreate, MessageOut
from ..services import conversation
from ..store import MongoStore, get_store

router = APIRouter()
settings = get_settings()


@router.post("", response_model=MessageOut, status_code=status.HTTP_201_CREATED)
async def send_message(
    request: Request,
    payload: MessageCreate,
    store: MongoStore = Depends(get_store),
):
    """Enviar un mensaje dentro de la conversación de una reserva"""
    apply_rate_limit(request, settings.rate_limit_messages, "messages")
    return await conversation.send_message(
        store, payload.booking_id, payload.sender_id, payload.receiver_id, payload.content
    )


@router.get("", response_model=List[MessageOut])
async def list_messages(
    booking_id: str = Query(...),
    store: MongoStore = Depends(get_store),
):
    """Mensajes de una reserva, del más antiguo al más reciente"""
    return await conversation.list_messages(store, booking_id)


@router.patch("/{message_id}/read", response_model=MessageOut)
async def mark_message_read(message_id: str, store: MongoStore = Depends(get_store)):
    """Marcar un mensaje como leído"""
    return await conversation.mark_message_read(store, message_id)
