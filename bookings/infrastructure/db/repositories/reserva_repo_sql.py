from datetime import date

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession

from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.domain.entities.reserva import Reserva
from bookings.infrastructure.db.tables import reservas, servicios

_RESERVA_COLUMNS = (
    reservas.c.id_reserva,
    reservas.c.fecha_reserva,
    reservas.c.hora,
    reservas.c.estado,
    reservas.c.dni_cliente,
    reservas.c.identificador_fiscal_empresa,
    reservas.c.id_servicio,
    servicios.c.nombre.label("nombre_servicio"),
)


def _to_reserva(row: RowMapping) -> Reserva:
    return Reserva(
        id_reserva=row["id_reserva"],
        fecha_reserva=row["fecha_reserva"],
        hora=row["hora"],
        estado=row["estado"],
        dni_cliente=row["dni_cliente"],
        identificador_fiscal_empresa=row["identificador_fiscal_empresa"],
        id_servicio=row["id_servicio"],
        nombre_servicio=row["nombre_servicio"],
    )


class ReservaRepoSQL(ReservaRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _select(self):
        return select(*_RESERVA_COLUMNS).select_from(
            reservas.outerjoin(servicios, servicios.c.id_servicio == reservas.c.id_servicio)
        )

    async def _fetch_all(self, stmt) -> list[Reserva]:
        result = await self._session.execute(stmt)
        return [_to_reserva(row) for row in result.mappings().all()]

    async def get_by_id(self, id_reserva: int) -> Reserva | None:
        stmt = self._select().where(reservas.c.id_reserva == id_reserva).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return _to_reserva(row)

    async def list_by_cliente(self, dni_cliente: str) -> list[Reserva]:
        stmt = (
            self._select()
            .where(reservas.c.dni_cliente == dni_cliente)
            .order_by(reservas.c.fecha_reserva, reservas.c.hora, reservas.c.id_reserva)
        )
        return await self._fetch_all(stmt)

    async def list_by_empresa(self, identificador_fiscal: str) -> list[Reserva]:
        stmt = (
            self._select()
            .where(reservas.c.identificador_fiscal_empresa == identificador_fiscal)
            .order_by(reservas.c.fecha_reserva, reservas.c.hora, reservas.c.id_reserva)
        )
        return await self._fetch_all(stmt)

    async def list_between(self, desde: date, hasta: date) -> list[Reserva]:
        stmt = (
            self._select()
            .where(reservas.c.fecha_reserva.between(desde, hasta))
            .order_by(reservas.c.fecha_reserva, reservas.c.hora, reservas.c.id_reserva)
        )
        return await self._fetch_all(stmt)

    async def count_by_servicio_and_fecha(
        self,
        id_servicio: int,
        fecha: date,
        exclude_id: int | None = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(reservas)
            .where(reservas.c.id_servicio == id_servicio, reservas.c.fecha_reserva == fecha)
        )
        if exclude_id is not None:
            stmt = stmt.where(reservas.c.id_reserva != exclude_id)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def create(self, reserva: Reserva) -> Reserva:
        stmt = insert(reservas).values(
            fecha_reserva=reserva.fecha_reserva,
            hora=reserva.hora,
            estado=reserva.estado,
            dni_cliente=reserva.dni_cliente,
            identificador_fiscal_empresa=reserva.identificador_fiscal_empresa,
            id_servicio=reserva.id_servicio,
        )
        result = await self._session.execute(stmt)
        created = reserva.copy()
        created.id_reserva = result.inserted_primary_key[0]
        return created

    async def update(self, reserva: Reserva) -> None:
        stmt = (
            update(reservas)
            .where(reservas.c.id_reserva == reserva.id_reserva)
            .values(
                fecha_reserva=reserva.fecha_reserva,
                hora=reserva.hora,
                estado=reserva.estado,
                dni_cliente=reserva.dni_cliente,
                identificador_fiscal_empresa=reserva.identificador_fiscal_empresa,
                id_servicio=reserva.id_servicio,
            )
        )
        await self._session.execute(stmt)

    async def delete(self, id_reserva: int) -> None:
        await self._session.execute(delete(reservas).where(reservas.c.id_reserva == id_reserva))

    async def delete_by_cliente(self, dni_cliente: str) -> int:
        result = await self._session.execute(
            delete(reservas).where(reservas.c.dni_cliente == dni_cliente)
        )
        return result.rowcount or 0

    async def delete_by_empresa(self, identificador_fiscal: str) -> int:
        result = await self._session.execute(
            delete(reservas).where(reservas.c.identificador_fiscal_empresa == identificador_fiscal)
        )
        return result.rowcount or 0
