"""Puertos de lectura sobre los directorios de clientes, empresas y servicios."""

from bookings.domain.entities.directory import ClienteRecord, EmpresaRecord
from bookings.domain.entities.servicio import Servicio


class ClientDirectory:
    async def exists(self, dni: str) -> bool:
        raise NotImplementedError

    async def find_full(self, dni: str) -> ClienteRecord | None:
        raise NotImplementedError


class CompanyDirectory:
    async def exists(self, identificador_fiscal: str) -> bool:
        raise NotImplementedError

    async def find_full(self, identificador_fiscal: str) -> EmpresaRecord | None:
        """Empresa con su empresario de contacto cargado, si lo tiene."""
        raise NotImplementedError


class ServiceDirectory:
    async def exists(self, id_servicio: int) -> bool:
        raise NotImplementedError

    async def find_by_id(self, id_servicio: int) -> Servicio | None:
        """Servicio con sus horarios cargados."""
        raise NotImplementedError
