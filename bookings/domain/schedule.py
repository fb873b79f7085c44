"""Conformidad de una fecha y hora con los horarios de un servicio."""

from datetime import date, time
from typing import Iterable

from bookings.domain.entities.horario import Horario


def matching_horario(horarios: Iterable[Horario], fecha: date, hora: time) -> Horario | None:
    """Primera ventana que cubre ``fecha`` y ``hora``, o ``None``."""
    for horario in horarios:
        if horario.covers(fecha, hora):
            return horario
    return None


def is_within_schedule(horarios: Iterable[Horario], fecha: date, hora: time) -> bool:
    # Basta con que una ventana aplique al día y contenga la hora.
    return matching_horario(horarios, fecha, hora) is not None
