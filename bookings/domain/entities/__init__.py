"""Entidades del dominio de reservas."""

from bookings.domain.entities.directory import ClienteRecord, EmpresaRecord, EmpresarioRecord
from bookings.domain.entities.horario import WEEKDAYS, Horario, parse_dias, weekday_token
from bookings.domain.entities.notificacion import Notificacion, RecipientKind, TipoNotificacion
from bookings.domain.entities.reserva import EstadoReserva, Reserva, ReservaUpdate
from bookings.domain.entities.servicio import Servicio

__all__ = [
    # Reserva
    "Reserva",
    "ReservaUpdate",
    "EstadoReserva",
    # Catálogo
    "Servicio",
    "Horario",
    "WEEKDAYS",
    "parse_dias",
    "weekday_token",
    # Notificaciones
    "Notificacion",
    "RecipientKind",
    "TipoNotificacion",
    # Directorios
    "ClienteRecord",
    "EmpresaRecord",
    "EmpresarioRecord",
]
