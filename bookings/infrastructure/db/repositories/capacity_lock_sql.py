from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from sqlalchemy import insert, select, update
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from bookings.application.interfaces.capacity_lock import CapacityLock
from bookings.infrastructure.db.tables import reserva_capacidad


class SQLCapacityLock(CapacityLock):
    """
    Bloqueo por (servicio, fecha) sobre una fila de ``reserva_capacidad``.

    Se inserta la fila si no existe y se actualiza a continuación: el UPDATE
    deja la fila bloqueada (en SQLite, la base entera) hasta el commit de la
    transacción en curso. Debe usarse dentro de ``TransactionManager.start()``.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def hold(self, id_servicio: int, fecha: date) -> AsyncIterator[None]:
        await self._ensure_row(id_servicio, fecha)
        await self._session.execute(
            update(reserva_capacidad)
            .where(
                reserva_capacidad.c.id_servicio == id_servicio,
                reserva_capacidad.c.fecha == fecha,
            )
            .values(version=reserva_capacidad.c.version + 1)
        )
        yield

    async def _ensure_row(self, id_servicio: int, fecha: date) -> None:
        values = {"id_servicio": id_servicio, "fecha": fecha, "version": 0}
        dialect = self._session.bind.dialect.name
        if dialect == "sqlite":
            stmt = sqlite.insert(reserva_capacidad).values(**values).on_conflict_do_nothing()
        elif dialect == "postgresql":
            stmt = postgresql.insert(reserva_capacidad).values(**values).on_conflict_do_nothing()
        elif dialect in ("mysql", "mariadb"):
            stmt = mysql.insert(reserva_capacidad).values(**values).prefix_with("IGNORE")
        else:
            existing = await self._session.execute(
                select(reserva_capacidad.c.version).where(
                    reserva_capacidad.c.id_servicio == id_servicio,
                    reserva_capacidad.c.fecha == fecha,
                )
            )
            if existing.first() is not None:
                return
            stmt = insert(reserva_capacidad).values(**values)
        await self._session.execute(stmt)
