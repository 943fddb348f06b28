"""
Ciclo de vida de una reserva.

    pending  -> accepted | rejected | cancelled
    accepted -> completed | cancelled
    rejected, completed, cancelled: terminales

Por defecto ``update_status`` acepta cualquier cambio (comportamiento
histórico de la API). Con ``enforce=True`` se aplica la tabla ``ALLOWED``,
que además dice qué participante puede pedir cada transición.
"""
import logging
from typing import Any, Dict, Optional

from ..errors import BookingNotFound, InvalidStatusTransition, StatusChangeNotAllowed
from ..schemas.booking import BookingStatus
from ..store import MongoStore
from ..utils import utcnow

logger = logging.getLogger(__name__)

OWNER = "owner"
SITTER = "sitter"

# Marca "no enviado" para distinguirlo de notes=None (que borra las notas)
UNSET: Any = object()

ALLOWED: dict[tuple[BookingStatus, BookingStatus], set[str]] = {
    (BookingStatus.pending, BookingStatus.accepted): {SITTER},
    (BookingStatus.pending, BookingStatus.rejected): {SITTER},
    (BookingStatus.pending, BookingStatus.cancelled): {OWNER, SITTER},
    (BookingStatus.accepted, BookingStatus.completed): {SITTER},
    (BookingStatus.accepted, BookingStatus.cancelled): {OWNER, SITTER},
}

TERMINAL = {BookingStatus.rejected, BookingStatus.completed, BookingStatus.cancelled}


def participant_role(booking: Dict[str, Any], user_id: Optional[str]) -> Optional[str]:
    if user_id is None:
        return None
    if str(booking.get("owner_id")) == user_id:
        return OWNER
    if str(booking.get("sitter_id")) == user_id:
        return SITTER
    return None


def other_participant(booking: Dict[str, Any], role: str) -> str:
    return str(booking["sitter_id"] if role == OWNER else booking["owner_id"])


def is_reviewable(booking: Dict[str, Any]) -> bool:
    return booking.get("status") == BookingStatus.completed.value


def check_transition(booking: Dict[str, Any], new: BookingStatus, actor_id: Optional[str]) -> None:
    old = BookingStatus(booking["status"])
    role = participant_role(booking, actor_id)
    if role is None:
        raise StatusChangeNotAllowed("Solo los participantes pueden cambiar el estado")
    if new == old:
        return
    if old in TERMINAL:
        raise InvalidStatusTransition(f"La reserva ya está cerrada ({old.value})")
    allowed_roles = ALLOWED.get((old, new))
    if allowed_roles is None:
        raise InvalidStatusTransition(f"Transición no permitida: {old.value} → {new.value}")
    if role not in allowed_roles:
        raise StatusChangeNotAllowed(f"El {role} no puede pasar la reserva a {new.value}")


async def update_status(
    store: MongoStore,
    booking_id: str,
    status: BookingStatus,
    notes: Any = UNSET,
    actor_id: Optional[str] = None,
    enforce: bool = False,
) -> Dict[str, Any]:
    booking = await store.find_booking_by_id(booking_id)
    if booking is None:
        raise BookingNotFound()

    status = BookingStatus(status)
    if enforce:
        check_transition(booking, status, actor_id)

    updates: Dict[str, Any] = {"status": status.value, "updated_at": utcnow()}
    if notes is not UNSET:
        updates["notes"] = notes

    updated = await store.update_booking(booking_id, updates)
    if updated is None:
        raise BookingNotFound()
    logger.info(f"Reserva {booking_id}: {booking.get('status')} → {status.value}")
    return updated
