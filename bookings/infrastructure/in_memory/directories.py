from bookings.application.interfaces.directories import (
    ClientDirectory,
    CompanyDirectory,
    ServiceDirectory,
)
from bookings.domain.entities.directory import ClienteRecord, EmpresaRecord
from bookings.domain.entities.servicio import Servicio


class InMemoryClientDirectory(ClientDirectory):
    def __init__(self) -> None:
        self.clientes: dict[str, ClienteRecord] = {}

    def add(self, cliente: ClienteRecord) -> None:
        self.clientes[cliente.dni] = cliente

    async def exists(self, dni: str) -> bool:
        return dni in self.clientes

    async def find_full(self, dni: str) -> ClienteRecord | None:
        return self.clientes.get(dni)


class InMemoryCompanyDirectory(CompanyDirectory):
    def __init__(self) -> None:
        self.empresas: dict[str, EmpresaRecord] = {}

    def add(self, empresa: EmpresaRecord) -> None:
        self.empresas[empresa.identificador_fiscal] = empresa

    async def exists(self, identificador_fiscal: str) -> bool:
        return identificador_fiscal in self.empresas

    async def find_full(self, identificador_fiscal: str) -> EmpresaRecord | None:
        return self.empresas.get(identificador_fiscal)


class InMemoryServiceDirectory(ServiceDirectory):
    def __init__(self) -> None:
        self.servicios: dict[int, Servicio] = {}

    def add(self, servicio: Servicio) -> None:
        self.servicios[servicio.id_servicio] = servicio

    async def exists(self, id_servicio: int) -> bool:
        return id_servicio in self.servicios

    async def find_by_id(self, id_servicio: int) -> Servicio | None:
        return self.servicios.get(id_servicio)
