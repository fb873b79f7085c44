"""Entidad Horario - ventana semanal de disponibilidad de un servicio."""

from dataclasses import dataclass
from datetime import date, time
from typing import Iterable

from bookings.domain.errors import ValidationError

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_DAY_ALIASES = {
    **{day.lower(): day for day in WEEKDAYS},
    "lunes": "Monday",
    "martes": "Tuesday",
    "miercoles": "Wednesday",
    "miércoles": "Wednesday",
    "jueves": "Thursday",
    "viernes": "Friday",
    "sabado": "Saturday",
    "sábado": "Saturday",
    "domingo": "Sunday",
}


def parse_dias(value: str | Iterable[str]) -> frozenset[str]:
    """
    Normaliza un conjunto de días a tokens en inglés ("Monday", ...).

    Acepta una cadena separada por comas (formato de la columna DIAS_LABORABLES)
    o un iterable de nombres, en inglés o castellano, sin distinguir mayúsculas.
    """
    tokens = value.split(",") if isinstance(value, str) else value
    dias: set[str] = set()
    for token in tokens:
        cleaned = token.strip().lower()
        if not cleaned:
            continue
        if cleaned not in _DAY_ALIASES:
            raise ValidationError("dias", f"día desconocido '{token.strip()}'")
        dias.add(_DAY_ALIASES[cleaned])
    return frozenset(dias)


def weekday_token(fecha: date) -> str:
    return WEEKDAYS[fecha.weekday()]


@dataclass(frozen=True)
class Horario:
    """
    Ventana semanal: un conjunto de días y un intervalo [inicio, fin).

    Una reserva puede empezar exactamente a la hora de apertura pero no a la de cierre.
    """

    dias: frozenset[str]
    inicio: time
    fin: time
    id_horario: int | None = None
    id_servicio: int | None = None
    identificador_fiscal_empresa: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "dias", parse_dias(self.dias))
        if self.inicio >= self.fin:
            raise ValidationError("horario", "la hora de inicio debe ser anterior a la de fin")

    def applies_on(self, fecha: date) -> bool:
        return weekday_token(fecha) in self.dias

    def contains_time(self, hora: time) -> bool:
        return self.inicio <= hora < self.fin

    def covers(self, fecha: date, hora: time) -> bool:
        return self.applies_on(fecha) and self.contains_time(hora)

    @property
    def dias_laborables(self) -> str:
        """Serialización estable para persistencia (orden lunes a domingo)."""
        return ",".join(day for day in WEEKDAYS if day in self.dias)
