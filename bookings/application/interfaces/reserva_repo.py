from datetime import date

from bookings.domain.entities.reserva import Reserva


class ReservaRepo:
    async def get_by_id(self, id_reserva: int) -> Reserva | None:
        raise NotImplementedError

    async def list_by_cliente(self, dni_cliente: str) -> list[Reserva]:
        raise NotImplementedError

    async def list_by_empresa(self, identificador_fiscal: str) -> list[Reserva]:
        raise NotImplementedError

    async def list_between(self, desde: date, hasta: date) -> list[Reserva]:
        """Reservas con ``desde <= fecha_reserva <= hasta``, ordenadas por fecha y hora."""
        raise NotImplementedError

    async def count_by_servicio_and_fecha(
        self,
        id_servicio: int,
        fecha: date,
        exclude_id: int | None = None,
    ) -> int:
        raise NotImplementedError

    async def create(self, reserva: Reserva) -> Reserva:
        """Inserta la reserva y la retorna con ``id_reserva`` asignado."""
        raise NotImplementedError

    async def update(self, reserva: Reserva) -> None:
        raise NotImplementedError

    async def delete(self, id_reserva: int) -> None:
        raise NotImplementedError

    async def delete_by_cliente(self, dni_cliente: str) -> int:
        raise NotImplementedError

    async def delete_by_empresa(self, identificador_fiscal: str) -> int:
        raise NotImplementedError
