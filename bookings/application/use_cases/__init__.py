"""Casos de uso del motor de reservas."""

from bookings.application.use_cases.cancel_reserva import (
    CancelReservasByClienteUseCase,
    CancelReservasByEmpresaUseCase,
    CancelReservaUseCase,
)
from bookings.application.use_cases.create_reserva import CreateReservaCommand, CreateReservaUseCase
from bookings.application.use_cases.evaluate_admission import AdmissionRule
from bookings.application.use_cases.get_reservas import (
    GetReservaUseCase,
    ListReservasByClienteUseCase,
    ListReservasByEmpresaUseCase,
)
from bookings.application.use_cases.manage_notificaciones import (
    DeleteNotificacionUseCase,
    GetNotificacionUseCase,
    ListNotificacionesUseCase,
)
from bookings.application.use_cases.notify import DispatchResult, NotificationDispatcher
from bookings.application.use_cases.send_reminders import ReminderScanner
from bookings.application.use_cases.update_reserva import UpdateReservaUseCase

__all__ = [
    "AdmissionRule",
    "CreateReservaCommand",
    "CreateReservaUseCase",
    "UpdateReservaUseCase",
    "CancelReservaUseCase",
    "CancelReservasByClienteUseCase",
    "CancelReservasByEmpresaUseCase",
    "GetReservaUseCase",
    "ListReservasByClienteUseCase",
    "ListReservasByEmpresaUseCase",
    "NotificationDispatcher",
    "DispatchResult",
    "ListNotificacionesUseCase",
    "GetNotificacionUseCase",
    "DeleteNotificacionUseCase",
    "ReminderScanner",
]
