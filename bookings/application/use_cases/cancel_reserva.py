import logging

from bookings.application.interfaces.directories import ClientDirectory, CompanyDirectory
from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.application.interfaces.transaction_manager import TransactionManager
from bookings.application.use_cases.notify import NotificationDispatcher
from bookings.domain.entities.notificacion import RecipientKind, TipoNotificacion
from bookings.domain.errors import BadRequestError, ReservaNotFoundError

logger = logging.getLogger(__name__)


class CancelReservaUseCase:
    def __init__(
        self,
        reserva_repo: ReservaRepo,
        transaction_manager: TransactionManager,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self._reserva_repo = reserva_repo
        self._transaction_manager = transaction_manager
        self._dispatcher = dispatcher

    async def execute(self, id_reserva: int) -> None:
        async with self._transaction_manager.start():
            reserva = await self._reserva_repo.get_by_id(id_reserva)
            if reserva is None:
                raise ReservaNotFoundError(id_reserva)
            await self._reserva_repo.delete(id_reserva)

        logger.info("Reserva cancelled", extra={"id_reserva": id_reserva})
        await self._dispatcher.notify_after_commit(
            RecipientKind.CLIENTE,
            reserva.dni_cliente,
            f"Se ha cancelado su reserva para el día {reserva.fecha_reserva.isoformat()} "
            f"a las {reserva.hora.isoformat()}.",
            TipoNotificacion.ADVERTENCIA,
        )


class CancelReservasByClienteUseCase:
    """Elimina todas las reservas de un cliente y le envía un único aviso resumen."""

    def __init__(
        self,
        reserva_repo: ReservaRepo,
        client_directory: ClientDirectory,
        transaction_manager: TransactionManager,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self._reserva_repo = reserva_repo
        self._clients = client_directory
        self._transaction_manager = transaction_manager
        self._dispatcher = dispatcher

    async def execute(self, dni_cliente: str) -> int:
        async with self._transaction_manager.start():
            if not await self._clients.exists(dni_cliente):
                raise BadRequestError(
                    f"No existe un cliente con DNI {dni_cliente}.", code="CLIENTE_NOT_FOUND"
                )
            deleted = await self._reserva_repo.delete_by_cliente(dni_cliente)

        logger.info(
            "Reservas cancelled for cliente",
            extra={"dni_cliente": dni_cliente, "deleted": deleted},
        )
        await self._dispatcher.notify_after_commit(
            RecipientKind.CLIENTE,
            dni_cliente,
            "Se han cancelado todas sus reservas.",
            TipoNotificacion.ADVERTENCIA,
        )
        return deleted


class CancelReservasByEmpresaUseCase:
    """Elimina todas las reservas de una empresa. No genera notificaciones."""

    def __init__(
        self,
        reserva_repo: ReservaRepo,
        company_directory: CompanyDirectory,
        transaction_manager: TransactionManager,
    ) -> None:
        self._reserva_repo = reserva_repo
        self._companies = company_directory
        self._transaction_manager = transaction_manager

    async def execute(self, identificador_fiscal: str) -> int:
        async with self._transaction_manager.start():
            if not await self._companies.exists(identificador_fiscal):
                raise BadRequestError(
                    f"No existe una empresa con identificador fiscal {identificador_fiscal}.",
                    code="EMPRESA_NOT_FOUND",
                )
            deleted = await self._reserva_repo.delete_by_empresa(identificador_fiscal)

        logger.info(
            "Reservas cancelled for empresa",
            extra={"identificador_fiscal": identificador_fiscal, "deleted": deleted},
        )
        return deleted
