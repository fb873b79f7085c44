from bookings.application.interfaces.notificacion_repo import NotificacionRepo
from bookings.application.interfaces.transaction_manager import TransactionManager
from bookings.domain.entities.notificacion import Notificacion
from bookings.domain.errors import NotificacionNotFoundError


class ListNotificacionesUseCase:
    def __init__(self, notificacion_repo: NotificacionRepo, transaction_manager: TransactionManager) -> None:
        self._notificacion_repo = notificacion_repo
        self._transaction_manager = transaction_manager

    async def by_cliente(self, dni_cliente: str) -> list[Notificacion]:
        async with self._transaction_manager.start():
            return await self._notificacion_repo.list_by_cliente(dni_cliente)

    async def by_empresario(self, dni_empresario: str) -> list[Notificacion]:
        async with self._transaction_manager.start():
            return await self._notificacion_repo.list_by_empresario(dni_empresario)


class GetNotificacionUseCase:
    def __init__(self, notificacion_repo: NotificacionRepo, transaction_manager: TransactionManager) -> None:
        self._notificacion_repo = notificacion_repo
        self._transaction_manager = transaction_manager

    async def execute(self, id_notificacion: int) -> Notificacion:
        async with self._transaction_manager.start():
            notificacion = await self._notificacion_repo.get_by_id(id_notificacion)
        if notificacion is None:
            raise NotificacionNotFoundError(id_notificacion)
        return notificacion


class DeleteNotificacionUseCase:
    def __init__(self, notificacion_repo: NotificacionRepo, transaction_manager: TransactionManager) -> None:
        self._notificacion_repo = notificacion_repo
        self._transaction_manager = transaction_manager

    async def execute(self, id_notificacion: int) -> None:
        async with self._transaction_manager.start():
            deleted = await self._notificacion_repo.delete(id_notificacion)
        if not deleted:
            raise NotificacionNotFoundError(id_notificacion)
