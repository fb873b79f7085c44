"""
Capa de Dominio - Motor de Reservas.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.

Estructura:
- entities/: Entidades del dominio (Reserva, Servicio, Horario, Notificacion)
- schedule.py: Conformidad de fecha y hora con los horarios
- admission.py: Regla de admisión (horario y capacidad)
- errors.py: Excepciones específicas del dominio
"""

from bookings.domain.admission import (
    AdmissionCandidate,
    AdmissionDecision,
    RejectionReason,
    decide,
)
from bookings.domain.entities import (
    ClienteRecord,
    EmpresaRecord,
    EmpresarioRecord,
    EstadoReserva,
    Horario,
    Notificacion,
    RecipientKind,
    Reserva,
    ReservaUpdate,
    Servicio,
    TipoNotificacion,
)
from bookings.domain.errors import (
    AdmissionRejectedError,
    BadRequestError,
    ClienteNotFoundError,
    DeliveryFailureError,
    DomainError,
    EmailDeliveryError,
    EmpresaNotFoundError,
    ErrorKind,
    InvalidRecipientError,
    MissingFieldsError,
    NotFoundError,
    NotificacionNotFoundError,
    ReservaNotFoundError,
    ServicioEmpresaMismatchError,
    ServicioNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from bookings.domain.schedule import is_within_schedule, matching_horario

__all__ = [
    # Entities
    "Reserva",
    "ReservaUpdate",
    "EstadoReserva",
    "Servicio",
    "Horario",
    "Notificacion",
    "RecipientKind",
    "TipoNotificacion",
    "ClienteRecord",
    "EmpresaRecord",
    "EmpresarioRecord",
    # Admission
    "AdmissionCandidate",
    "AdmissionDecision",
    "RejectionReason",
    "decide",
    "is_within_schedule",
    "matching_horario",
    # Errors
    "DomainError",
    "ErrorKind",
    "NotFoundError",
    "BadRequestError",
    "DeliveryFailureError",
    "UnauthorizedError",
    "ClienteNotFoundError",
    "EmpresaNotFoundError",
    "ServicioNotFoundError",
    "ReservaNotFoundError",
    "NotificacionNotFoundError",
    "ValidationError",
    "MissingFieldsError",
    "ServicioEmpresaMismatchError",
    "InvalidRecipientError",
    "AdmissionRejectedError",
    "EmailDeliveryError",
]
