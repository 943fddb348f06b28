import logging
from typing import Any, Dict

from ..errors import BookingNotFound, InvalidReceiver, MessageNotFound, SenderNotAuthorized
from ..store import MongoStore
from ..utils import utcnow
from .lifecycle import other_participant, participant_role

logger = logging.getLogger(__name__)


async def authorize_message(store: MongoStore, booking_id: str, sender_id: str, receiver_id: str) -> Dict[str, Any]:
    """Solo el dueño y el cuidador de la reserva pueden escribirse entre ellos."""
    booking = await store.find_booking_by_id(booking_id)
    if booking is None:
        raise BookingNotFound()

    role = participant_role(booking, sender_id)
    if role is None:
        logger.warning(f"Remitente {sender_id} ajeno a la reserva {booking_id}")
        raise SenderNotAuthorized()

    if receiver_id != other_participant(booking, role):
        logger.warning(f"Destinatario {receiver_id} inválido en la reserva {booking_id}")
        raise InvalidReceiver()
    return booking


async def send_message(store: MongoStore, booking_id: str, sender_id: str, receiver_id: str, content: str) -> Dict[str, Any]:
    await authorize_message(store, booking_id, sender_id, receiver_id)
    created = await store.insert_message({
        "booking_id": booking_id,
        "sender_id": sender_id,
        "receiver_id": receiver_id,
        "content": content,
        "is_read": False,
        "created_at": utcnow(),
    })
    logger.info(f"Mensaje {created['id']} en la reserva {booking_id}")
    return created


async def list_messages(store: MongoStore, booking_id: str) -> list[Dict[str, Any]]:
    return await store.find_messages({"booking_id": booking_id})


async def mark_message_read(store: MongoStore, message_id: str) -> Dict[str, Any]:
    # is_read nunca vuelve a False
    updated = await store.mark_message_read(message_id)
    if updated is None:
        raise MessageNotFound()
    return updated
