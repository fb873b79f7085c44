"""Excepciones de dominio para el motor de reservas."""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookings.domain.admission import RejectionReason


class ErrorKind(str, Enum):
    """Categoría de error visible para el llamante."""

    NOT_FOUND = "NotFound"
    BAD_REQUEST = "BadRequest"
    DELIVERY_FAILURE = "DeliveryFailure"
    UNAUTHORIZED = "Unauthorized"


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class NotFoundError(DomainError):
    kind = ErrorKind.NOT_FOUND


class BadRequestError(DomainError):
    kind = ErrorKind.BAD_REQUEST


class DeliveryFailureError(DomainError):
    kind = ErrorKind.DELIVERY_FAILURE


class UnauthorizedError(DomainError):
    kind = ErrorKind.UNAUTHORIZED


# === Entidades no encontradas ===


class ClienteNotFoundError(NotFoundError):
    """El cliente no existe."""

    def __init__(self, dni: str):
        super().__init__(
            message=f"No existe un cliente con DNI {dni}.",
            code="CLIENTE_NOT_FOUND",
        )
        self.dni = dni


class EmpresaNotFoundError(NotFoundError):
    """La empresa o autónomo no existe."""

    def __init__(self, identificador_fiscal: str):
        super().__init__(
            message=f"No existe una empresa con identificador fiscal {identificador_fiscal}.",
            code="EMPRESA_NOT_FOUND",
        )
        self.identificador_fiscal = identificador_fiscal


class ServicioNotFoundError(NotFoundError):
    """El servicio no existe."""

    def __init__(self, id_servicio: int):
        super().__init__(
            message=f"No existe un servicio con el ID {id_servicio}.",
            code="SERVICIO_NOT_FOUND",
        )
        self.id_servicio = id_servicio


class ReservaNotFoundError(NotFoundError):
    """La reserva no existe."""

    def __init__(self, id_reserva: int):
        super().__init__(
            message=f"No se encontró una reserva con ID {id_reserva}.",
            code="RESERVA_NOT_FOUND",
        )
        self.id_reserva = id_reserva


class NotificacionNotFoundError(NotFoundError):
    """La notificación no existe."""

    def __init__(self, id_notificacion: int):
        super().__init__(
            message=f"No se encontró una notificación con ID {id_notificacion}.",
            code="NOTIFICACION_NOT_FOUND",
        )
        self.id_notificacion = id_notificacion


# === Errores de validación ===


class ValidationError(BadRequestError):
    """Error de validación de datos de entrada."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validación fallida en '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field


class MissingFieldsError(BadRequestError):
    """Faltan campos obligatorios de la reserva."""

    def __init__(self, fields: list[str]):
        super().__init__(
            message=f"Fecha, hora y estado son obligatorios (faltan: {', '.join(fields)})",
            code="MISSING_FIELDS",
        )
        self.fields = fields


class ServicioEmpresaMismatchError(BadRequestError):
    """El servicio no pertenece a la empresa indicada."""

    def __init__(self, id_servicio: int, identificador_fiscal: str):
        super().__init__(
            message=f"El servicio con ID {id_servicio} no pertenece a la empresa "
            f"con identificador fiscal {identificador_fiscal}",
            code="SERVICE_COMPANY_MISMATCH",
        )
        self.id_servicio = id_servicio
        self.identificador_fiscal = identificador_fiscal


class InvalidRecipientError(BadRequestError):
    """La notificación debe tener exactamente un destinatario."""

    def __init__(self, message: str = "Debe especificar cliente o empresario, pero no ambos"):
        super().__init__(message=message, code="INVALID_RECIPIENT")


# === Admisión ===


class AdmissionRejectedError(BadRequestError):
    """La regla de admisión rechazó la reserva."""

    def __init__(self, reason: "RejectionReason"):
        super().__init__(message=reason.message, code=reason.code)
        self.reason = reason


# === Entrega de emails ===


class EmailDeliveryError(DeliveryFailureError):
    """Fallo de transporte al enviar un email."""

    def __init__(self, recipient: str, detail: str):
        super().__init__(
            message=f"Error al enviar el email a {recipient}: {detail}",
            code="EMAIL_DELIVERY_FAILED",
        )
        self.recipient = recipient
        self.detail = detail
