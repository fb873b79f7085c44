from bookings.domain.entities.notificacion import Notificacion


class NotificacionRepo:
    async def save(self, notificacion: Notificacion) -> Notificacion:
        """Persiste la notificación y la retorna con ``id_notificacion`` asignado."""
        raise NotImplementedError

    async def get_by_id(self, id_notificacion: int) -> Notificacion | None:
        raise NotImplementedError

    async def list_by_cliente(self, dni_cliente: str) -> list[Notificacion]:
        raise NotImplementedError

    async def list_by_empresario(self, dni_empresario: str) -> list[Notificacion]:
        raise NotImplementedError

    async def delete(self, id_notificacion: int) -> bool:
        raise NotImplementedError
