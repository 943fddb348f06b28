"""
Errores de dominio de PawSit.

Cada error lleva un ``kind`` estable (el nombre de la clase) que la capa HTTP
devuelve junto al ``detail``. Los servicios nunca lanzan ``HTTPException``:
el mapeo a códigos de estado vive aquí y lo aplica el handler de ``main``.
"""


class PawSitError(Exception):
    """Base de todos los errores que el núcleo devuelve al llamador."""

    status_code: int = 400
    retryable: bool = False
    default_detail: str = "Solicitud inválida"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {"detail": self.detail, "kind": self.kind, "retryable": self.retryable}


# ---------- NotFound ----------

class NotFoundError(PawSitError):
    status_code = 404
    default_detail = "Recurso no encontrado"


class OwnerNotFound(NotFoundError):
    default_detail = "Dueño no encontrado"


class SitterNotFound(NotFoundError):
    default_detail = "Cuidador no encontrado"


class DogNotFound(NotFoundError):
    default_detail = "Perro no encontrado"


class ListingNotFound(NotFoundError):
    default_detail = "Anuncio no encontrado"


class BookingNotFound(NotFoundError):
    default_detail = "Reserva no encontrada"


class ReviewerNotFound(NotFoundError):
    default_detail = "Autor de la reseña no encontrado"


class RevieweeNotFound(NotFoundError):
    default_detail = "Usuario reseñado no encontrado"


class MessageNotFound(NotFoundError):
    default_detail = "Mensaje no encontrado"


class UserNotFound(NotFoundError):
    default_detail = "Usuario no encontrado"


# ---------- Consistencia entre entidades ----------

class ConsistencyError(PawSitError):
    status_code = 400
    default_detail = "Relación entre entidades inválida"


class DogOwnershipMismatch(ConsistencyError):
    default_detail = "El perro no pertenece al dueño indicado"


class ListingOwnershipMismatch(ConsistencyError):
    default_detail = "El anuncio no pertenece al cuidador indicado"


class InvalidReceiver(ConsistencyError):
    default_detail = "Destinatario inválido para esta conversación"


class InvalidReviewee(ConsistencyError):
    default_detail = "Usuario reseñado inválido para esta reserva"


class NotASitter(ConsistencyError):
    status_code = 403
    default_detail = "El usuario no tiene rol de cuidador"


class SenderNotAuthorized(ConsistencyError):
    status_code = 403
    default_detail = "El remitente no participa en esta reserva"


class ReviewerNotParticipant(ConsistencyError):
    status_code = 403
    default_detail = "Solo los participantes de la reserva pueden reseñar"


class StatusChangeNotAllowed(ConsistencyError):
    status_code = 403
    default_detail = "No puedes cambiar el estado de esta reserva"


# ---------- Estado ----------

class StateError(PawSitError):
    status_code = 409
    default_detail = "Operación no permitida en el estado actual"


class BookingNotCompleted(StateError):
    status_code = 400
    default_detail = "Solo se pueden reseñar reservas completadas"


class DuplicateReview(StateError):
    default_detail = "Ya existe una reseña tuya para esta reserva"


class EmailAlreadyRegistered(StateError):
    default_detail = "Email ya registrado"


class InvalidStatusTransition(StateError):
    default_detail = "Transición de estado no permitida"


# ---------- Dominio ----------

class DomainError(PawSitError):
    status_code = 400
    default_detail = "Datos de entrada inválidos"


class InvalidServiceType(DomainError):
    default_detail = "Tipo de servicio inválido"


class InvalidDateRange(DomainError):
    default_detail = "end_date debe ser posterior a start_date"


# ---------- Infraestructura ----------

class InfrastructureError(PawSitError):
    """Fallo transitorio del almacén; el llamador puede reintentar."""

    status_code = 503
    retryable = True
    default_detail = "Servicio temporalmente no disponible"


class StoreUnavailable(InfrastructureError):
    default_detail = "Base de datos no disponible, inténtalo de nuevo"
