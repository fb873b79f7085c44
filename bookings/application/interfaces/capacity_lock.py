from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date
from typing import Protocol


class CapacityLock(Protocol):
    """
    Serializa las admisiones que compiten por el mismo (servicio, fecha).

    Mientras se mantiene ``hold``, ninguna otra admisión para la misma clave
    puede contar ni insertar. Las claves distintas no se bloquean entre sí.
    """

    @asynccontextmanager
    async def hold(self, id_servicio: int, fecha: date) -> AsyncIterator[None]:
        yield
