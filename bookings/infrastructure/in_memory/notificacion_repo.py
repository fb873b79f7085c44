from dataclasses import replace

from bookings.application.interfaces.notificacion_repo import NotificacionRepo
from bookings.domain.entities.notificacion import Notificacion


class InMemoryNotificacionRepo(NotificacionRepo):
    def __init__(self) -> None:
        self.notificaciones: dict[int, Notificacion] = {}
        self._next_id = 1

    async def save(self, notificacion: Notificacion) -> Notificacion:
        stored = replace(notificacion, id_notificacion=self._next_id)
        self._next_id += 1
        self.notificaciones[stored.id_notificacion] = stored
        return stored

    async def get_by_id(self, id_notificacion: int) -> Notificacion | None:
        return self.notificaciones.get(id_notificacion)

    async def list_by_cliente(self, dni_cliente: str) -> list[Notificacion]:
        return [n for n in self.notificaciones.values() if n.dni_cliente == dni_cliente]

    async def list_by_empresario(self, dni_empresario: str) -> list[Notificacion]:
        return [n for n in self.notificaciones.values() if n.dni_empresario == dni_empresario]

    async def delete(self, id_notificacion: int) -> bool:
        return self.notificaciones.pop(id_notificacion, None) is not None
