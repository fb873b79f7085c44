"""Entidad Reserva - registro del libro de reservas."""

from dataclasses import dataclass, fields, replace
from datetime import date, time
from enum import Enum


class EstadoReserva(str, Enum):
    """Estados conocidos. El campo ``estado`` sigue siendo texto libre."""

    PENDIENTE = "PENDIENTE"
    CONFIRMADA = "CONFIRMADA"
    CANCELADA = "CANCELADA"
    COMPLETADA = "COMPLETADA"


@dataclass(frozen=True)
class ReservaUpdate:
    """
    Actualización parcial de una reserva.

    Cada campo a ``None`` se deja sin cambios; el resto sustituye al valor actual.
    """

    fecha_reserva: date | None = None
    hora: time | None = None
    estado: str | None = None
    dni_cliente: str | None = None
    identificador_fiscal_empresa: str | None = None
    id_servicio: int | None = None

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def changes(self) -> dict[str, object]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class Reserva:
    fecha_reserva: date
    hora: time
    estado: str
    dni_cliente: str
    identificador_fiscal_empresa: str
    id_servicio: int
    id_reserva: int | None = None
    nombre_servicio: str | None = None

    @property
    def capacity_key(self) -> tuple[int, date]:
        return (self.id_servicio, self.fecha_reserva)

    def apply(self, update: ReservaUpdate) -> "Reserva":
        """Devuelve una copia con los campos presentes en ``update`` aplicados."""
        return replace(self, **update.changes())

    def copy(self) -> "Reserva":
        return replace(self)
