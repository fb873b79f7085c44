from bookings.infrastructure.db.repositories.capacity_lock_sql import SQLCapacityLock
from bookings.infrastructure.db.repositories.directories_sql import (
    ClientDirectorySQL,
    CompanyDirectorySQL,
    ServiceDirectorySQL,
)
from bookings.infrastructure.db.repositories.notificacion_repo_sql import NotificacionRepoSQL
from bookings.infrastructure.db.repositories.reserva_repo_sql import ReservaRepoSQL

__all__ = [
    "ReservaRepoSQL",
    "NotificacionRepoSQL",
    "ClientDirectorySQL",
    "CompanyDirectorySQL",
    "ServiceDirectorySQL",
    "SQLCapacityLock",
]
