"""Interfaces (Puertos) de la capa de aplicación."""

from bookings.application.interfaces.capacity_lock import CapacityLock
from bookings.application.interfaces.clock import Clock, FakeClock, SystemClock
from bookings.application.interfaces.directories import (
    ClientDirectory,
    CompanyDirectory,
    ServiceDirectory,
)
from bookings.application.interfaces.email_gateway import EmailGateway
from bookings.application.interfaces.notificacion_repo import NotificacionRepo
from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.application.interfaces.transaction_manager import TransactionManager

__all__ = [
    # Repositories
    "ReservaRepo",
    "NotificacionRepo",
    # Directories
    "ClientDirectory",
    "CompanyDirectory",
    "ServiceDirectory",
    # Gateways
    "EmailGateway",
    # Concurrency
    "CapacityLock",
    "TransactionManager",
    # Services
    "Clock",
    "SystemClock",
    "FakeClock",
]
