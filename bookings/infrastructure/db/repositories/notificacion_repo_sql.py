from sqlalchemy import delete, insert, select
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession

from bookings.application.interfaces.notificacion_repo import NotificacionRepo
from bookings.domain.entities.notificacion import Notificacion
from bookings.infrastructure.db.tables import notificaciones


def _to_notificacion(row: RowMapping) -> Notificacion:
    return Notificacion(
        id_notificacion=row["id_notificacion"],
        dni_cliente=row["dni_cliente"],
        dni_empresario=row["dni_empresario"],
        mensaje=row["mensaje"],
        tipo=row["tipo"],
        fecha_alta=row["fecha_alta"],
    )


class NotificacionRepoSQL(NotificacionRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, notificacion: Notificacion) -> Notificacion:
        # La columna es naive: se guarda la hora local sin zona.
        fecha_alta = notificacion.fecha_alta.replace(tzinfo=None) if notificacion.fecha_alta else None
        stmt = insert(notificaciones).values(
            dni_cliente=notificacion.dni_cliente,
            dni_empresario=notificacion.dni_empresario,
            mensaje=notificacion.mensaje,
            tipo=notificacion.tipo.value,
            fecha_alta=fecha_alta,
        )
        result = await self._session.execute(stmt)
        return Notificacion(
            id_notificacion=result.inserted_primary_key[0],
            dni_cliente=notificacion.dni_cliente,
            dni_empresario=notificacion.dni_empresario,
            mensaje=notificacion.mensaje,
            tipo=notificacion.tipo,
            fecha_alta=notificacion.fecha_alta,
        )

    async def get_by_id(self, id_notificacion: int) -> Notificacion | None:
        stmt = select(notificaciones).where(notificaciones.c.id_notificacion == id_notificacion)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return _to_notificacion(row)

    async def list_by_cliente(self, dni_cliente: str) -> list[Notificacion]:
        stmt = (
            select(notificaciones)
            .where(notificaciones.c.dni_cliente == dni_cliente)
            .order_by(notificaciones.c.id_notificacion)
        )
        result = await self._session.execute(stmt)
        return [_to_notificacion(row) for row in result.mappings().all()]

    async def list_by_empresario(self, dni_empresario: str) -> list[Notificacion]:
        stmt = (
            select(notificaciones)
            .where(notificaciones.c.dni_empresario == dni_empresario)
            .order_by(notificaciones.c.id_notificacion)
        )
        result = await self._session.execute(stmt)
        return [_to_notificacion(row) for row in result.mappings().all()]

    async def delete(self, id_notificacion: int) -> bool:
        result = await self._session.execute(
            delete(notificaciones).where(notificaciones.c.id_notificacion == id_notificacion)
        )
        return bool(result.rowcount)
