"""Implementaciones in-memory para desarrollo y testing."""

from bookings.infrastructure.in_memory.capacity_lock import InMemoryCapacityLock
from bookings.infrastructure.in_memory.directories import (
    InMemoryClientDirectory,
    InMemoryCompanyDirectory,
    InMemoryServiceDirectory,
)
from bookings.infrastructure.in_memory.email_gateway import RecordingEmailGateway, SentEmail
from bookings.infrastructure.in_memory.notificacion_repo import InMemoryNotificacionRepo
from bookings.infrastructure.in_memory.reserva_repo import InMemoryReservaRepo
from bookings.infrastructure.in_memory.transaction_manager import NoopTransactionManager

__all__ = [
    # Repositories
    "InMemoryReservaRepo",
    "InMemoryNotificacionRepo",
    # Directories
    "InMemoryClientDirectory",
    "InMemoryCompanyDirectory",
    "InMemoryServiceDirectory",
    # Gateways
    "RecordingEmailGateway",
    "SentEmail",
    # Infrastructure
    "InMemoryCapacityLock",
    "NoopTransactionManager",
]
