"""
Regla de admisión de reservas.

Decide, sin efectos secundarios, si una reserva candidata puede aceptarse para
un servicio. Las comprobaciones se evalúan en este orden y la primera que falla
determina el motivo del rechazo:

1. El servicio existe.
2. El servicio tiene al menos un horario.
3. Algún horario cubre el día de la semana y la hora.
4. Quedan plazas: reservas existentes para (servicio, fecha) < límite diario.
"""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum

from bookings.domain.entities.servicio import Servicio
from bookings.domain.errors import AdmissionRejectedError
from bookings.domain.schedule import is_within_schedule


class RejectionReason(str, Enum):
    SERVICE_NOT_FOUND = "SERVICE_NOT_FOUND"
    SCHEDULE_UNDEFINED = "SCHEDULE_UNDEFINED"
    OUTSIDE_SCHEDULE = "OUTSIDE_SCHEDULE"
    CAPACITY_REACHED = "CAPACITY_REACHED"

    @property
    def code(self) -> str:
        return self.value

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    RejectionReason.SERVICE_NOT_FOUND: "El servicio solicitado no existe.",
    RejectionReason.SCHEDULE_UNDEFINED: "El servicio no tiene horarios definidos.",
    RejectionReason.OUTSIDE_SCHEDULE: "La fecha y hora no están dentro del horario disponible.",
    RejectionReason.CAPACITY_REACHED: "No hay disponibilidad para la fecha seleccionada.",
}


@dataclass(frozen=True)
class AdmissionCandidate:
    """
    Reserva que se quiere admitir.

    En una edición, ``excluding_reserva_id`` es la reserva que se modifica: sólo
    se descuenta del recuento cuando sigue en el mismo servicio y fecha.
    """

    id_servicio: int
    fecha: date
    hora: time
    excluding_reserva_id: int | None = None


@dataclass(frozen=True)
class AdmissionDecision:
    accepted: bool
    reason: RejectionReason | None = None

    @classmethod
    def accept(cls) -> "AdmissionDecision":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "AdmissionDecision":
        return cls(accepted=False, reason=reason)

    def raise_if_rejected(self) -> None:
        if not self.accepted:
            raise AdmissionRejectedError(self.reason)


def schedule_rejection(servicio: Servicio, fecha: date, hora: time) -> RejectionReason | None:
    if not servicio.has_schedule:
        return RejectionReason.SCHEDULE_UNDEFINED
    if not is_within_schedule(servicio.horarios, fecha, hora):
        return RejectionReason.OUTSIDE_SCHEDULE
    return None


def capacity_rejection(servicio: Servicio, current_count: int) -> RejectionReason | None:
    if current_count >= servicio.limite_reservas:
        return RejectionReason.CAPACITY_REACHED
    return None


def decide(
    servicio: Servicio | None,
    candidate: AdmissionCandidate,
    current_count: int,
) -> AdmissionDecision:
    """Aplica las cuatro comprobaciones con un recuento ya calculado."""
    if servicio is None:
        return AdmissionDecision.reject(RejectionReason.SERVICE_NOT_FOUND)

    reason = schedule_rejection(servicio, candidate.fecha, candidate.hora)
    if reason is None:
        reason = capacity_rejection(servicio, current_count)

    if reason is not None:
        return AdmissionDecision.reject(reason)
    return AdmissionDecision.accept()
