from bookings.application.interfaces.directories import ClientDirectory, CompanyDirectory
from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.application.interfaces.transaction_manager import TransactionManager
from bookings.domain.entities.reserva import Reserva
from bookings.domain.errors import (
    ClienteNotFoundError,
    EmpresaNotFoundError,
    ReservaNotFoundError,
)


class GetReservaUseCase:
    def __init__(self, reserva_repo: ReservaRepo, transaction_manager: TransactionManager) -> None:
        self._reserva_repo = reserva_repo
        self._transaction_manager = transaction_manager

    async def execute(self, id_reserva: int) -> Reserva:
        async with self._transaction_manager.start():
            reserva = await self._reserva_repo.get_by_id(id_reserva)
        if reserva is None:
            raise ReservaNotFoundError(id_reserva)
        return reserva


class ListReservasByClienteUseCase:
    def __init__(
        self,
        reserva_repo: ReservaRepo,
        client_directory: ClientDirectory,
        transaction_manager: TransactionManager,
    ) -> None:
        self._reserva_repo = reserva_repo
        self._clients = client_directory
        self._transaction_manager = transaction_manager

    async def execute(self, dni_cliente: str) -> list[Reserva]:
        async with self._transaction_manager.start():
            if not await self._clients.exists(dni_cliente):
                raise ClienteNotFoundError(dni_cliente)
            return await self._reserva_repo.list_by_cliente(dni_cliente)


class ListReservasByEmpresaUseCase:
    def __init__(
        self,
        reserva_repo: ReservaRepo,
        company_directory: CompanyDirectory,
        transaction_manager: TransactionManager,
    ) -> None:
        self._reserva_repo = reserva_repo
        self._companies = company_directory
        self._transaction_manager = transaction_manager

    async def execute(self, identificador_fiscal: str) -> list[Reserva]:
        async with self._transaction_manager.start():
            if not await self._companies.exists(identificador_fiscal):
                raise EmpresaNotFoundError(identificador_fiscal)
            return await self._reserva_repo.list_by_empresa(identificador_fiscal)
