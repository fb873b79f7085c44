"""Entidad Servicio - oferta reservable del catálogo."""

from dataclasses import dataclass, field
from decimal import Decimal

from bookings.domain.entities.horario import Horario
from bookings.domain.errors import ValidationError


@dataclass
class Servicio:
    """
    Servicio ofrecido por una empresa o autónomo.

    El motor de reservas sólo lo lee: el límite diario y los horarios
    determinan si una reserva puede admitirse.
    """

    id_servicio: int
    nombre: str
    limite_reservas: int
    identificador_fiscal_empresa: str
    descripcion: str = ""
    duracion: int = 0
    precio: Decimal = Decimal("0")
    horarios: list[Horario] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.limite_reservas < 1:
            raise ValidationError("limite_reservas", "debe ser al menos 1")

    @property
    def has_schedule(self) -> bool:
        return bool(self.horarios)

    def belongs_to(self, identificador_fiscal: str) -> bool:
        return self.identificador_fiscal_empresa == identificador_fiscal
