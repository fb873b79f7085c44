from datetime import date

from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.domain.entities.reserva import Reserva


class InMemoryReservaRepo(ReservaRepo):
    def __init__(self) -> None:
        self.reservas: dict[int, Reserva] = {}
        self._next_id = 1

    def _sorted(self, items) -> list[Reserva]:
        ordered = sorted(items, key=lambda r: (r.fecha_reserva, r.hora, r.id_reserva))
        return [r.copy() for r in ordered]

    async def get_by_id(self, id_reserva: int) -> Reserva | None:
        reserva = self.reservas.get(id_reserva)
        return reserva.copy() if reserva else None

    async def list_by_cliente(self, dni_cliente: str) -> list[Reserva]:
        return self._sorted(r for r in self.reservas.values() if r.dni_cliente == dni_cliente)

    async def list_by_empresa(self, identificador_fiscal: str) -> list[Reserva]:
        return self._sorted(
            r for r in self.reservas.values() if r.identificador_fiscal_empresa == identificador_fiscal
        )

    async def list_between(self, desde: date, hasta: date) -> list[Reserva]:
        return self._sorted(r for r in self.reservas.values() if desde <= r.fecha_reserva <= hasta)

    async def count_by_servicio_and_fecha(
        self,
        id_servicio: int,
        fecha: date,
        exclude_id: int | None = None,
    ) -> int:
        return sum(
            1
            for r in self.reservas.values()
            if r.id_servicio == id_servicio
            and r.fecha_reserva == fecha
            and r.id_reserva != exclude_id
        )

    async def create(self, reserva: Reserva) -> Reserva:
        stored = reserva.copy()
        stored.id_reserva = self._next_id
        self._next_id += 1
        self.reservas[stored.id_reserva] = stored
        return stored.copy()

    async def update(self, reserva: Reserva) -> None:
        if reserva.id_reserva not in self.reservas:
            raise ValueError("Reserva not found")
        self.reservas[reserva.id_reserva] = reserva.copy()

    async def delete(self, id_reserva: int) -> None:
        self.reservas.pop(id_reserva, None)

    async def delete_by_cliente(self, dni_cliente: str) -> int:
        ids = [i for i, r in self.reservas.items() if r.dni_cliente == dni_cliente]
        for id_reserva in ids:
            del self.reservas[id_reserva]
        return len(ids)

    async def delete_by_empresa(self, identificador_fiscal: str) -> int:
        ids = [
            i for i, r in self.reservas.items() if r.identificador_fiscal_empresa == identificador_fiscal
        ]
        for id_reserva in ids:
            del self.reservas[id_reserva]
        return len(ids)
