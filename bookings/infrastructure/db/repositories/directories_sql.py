"""Lectura de clientes, empresas y servicios desde las tablas del catálogo."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookings.application.interfaces.directories import (
    ClientDirectory,
    CompanyDirectory,
    ServiceDirectory,
)
from bookings.domain.entities.directory import ClienteRecord, EmpresaRecord, EmpresarioRecord
from bookings.domain.entities.horario import Horario
from bookings.domain.entities.servicio import Servicio
from bookings.infrastructure.db.tables import clientes, empresarios, empresas, horarios, servicios


class ClientDirectorySQL(ClientDirectory):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, dni: str) -> bool:
        result = await self._session.execute(
            select(clientes.c.id).where(clientes.c.dni == dni).limit(1)
        )
        return result.scalar() is not None

    async def find_full(self, dni: str) -> ClienteRecord | None:
        result = await self._session.execute(select(clientes).where(clientes.c.dni == dni))
        row = result.mappings().first()
        if not row:
            return None
        return ClienteRecord(
            dni=row["dni"],
            nombre=row["nombre"],
            apellidos=row["apellidos"] or "",
            email=row["email"],
            telefono=row["telefono"],
        )


class CompanyDirectorySQL(CompanyDirectory):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, identificador_fiscal: str) -> bool:
        result = await self._session.execute(
            select(empresas.c.id).where(empresas.c.identificador_fiscal == identificador_fiscal).limit(1)
        )
        return result.scalar() is not None

    async def find_full(self, identificador_fiscal: str) -> EmpresaRecord | None:
        stmt = (
            select(
                empresas.c.identificador_fiscal,
                empresas.c.nombre,
                empresas.c.email,
                empresarios.c.dni.label("empresario_dni"),
                empresarios.c.nombre.label("empresario_nombre"),
                empresarios.c.apellidos.label("empresario_apellidos"),
                empresarios.c.email.label("empresario_email"),
            )
            .select_from(
                empresas.outerjoin(empresarios, empresarios.c.dni == empresas.c.dni_empresario)
            )
            .where(empresas.c.identificador_fiscal == identificador_fiscal)
        )
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        empresario = None
        if row["empresario_dni"] is not None:
            empresario = EmpresarioRecord(
                dni=row["empresario_dni"],
                nombre=row["empresario_nombre"],
                apellidos=row["empresario_apellidos"] or "",
                email=row["empresario_email"],
            )
        return EmpresaRecord(
            identificador_fiscal=row["identificador_fiscal"],
            nombre=row["nombre"],
            email=row["email"],
            empresario=empresario,
        )


class ServiceDirectorySQL(ServiceDirectory):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def exists(self, id_servicio: int) -> bool:
        result = await self._session.execute(
            select(servicios.c.id_servicio).where(servicios.c.id_servicio == id_servicio)
        )
        return result.scalar() is not None

    async def find_by_id(self, id_servicio: int) -> Servicio | None:
        result = await self._session.execute(
            select(servicios).where(servicios.c.id_servicio == id_servicio)
        )
        row = result.mappings().first()
        if not row:
            return None

        horario_rows = await self._session.execute(
            select(horarios)
            .where(horarios.c.id_servicio == id_servicio)
            .order_by(horarios.c.id_horario)
        )
        return Servicio(
            id_servicio=row["id_servicio"],
            nombre=row["nombre"],
            descripcion=row["descripcion"] or "",
            duracion=row["duracion"],
            precio=row["precio"],
            limite_reservas=row["limite_reservas"],
            identificador_fiscal_empresa=row["identificador_fiscal_empresa"],
            horarios=[
                Horario(
                    id_horario=h["id_horario"],
                    id_servicio=h["id_servicio"],
                    identificador_fiscal_empresa=h["identificador_fiscal_empresa"],
                    dias=h["dias_laborables"],
                    inicio=h["horario_inicio"],
                    fin=h["horario_fin"],
                )
                for h in horario_rows.mappings().all()
            ],
        )
