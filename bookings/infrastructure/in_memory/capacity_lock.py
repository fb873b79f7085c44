import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from bookings.application.interfaces.capacity_lock import CapacityLock


class InMemoryCapacityLock(CapacityLock):
    """
    Un ``asyncio.Lock`` por (servicio, fecha), creado bajo demanda.

    La entrada se elimina cuando sale el último que la mantiene o espera.
    """

    def __init__(self) -> None:
        self._locks: dict[tuple[int, date], asyncio.Lock] = {}
        self._holders: dict[tuple[int, date], int] = {}

    @asynccontextmanager
    async def hold(self, id_servicio: int, fecha: date) -> AsyncIterator[None]:
        key = (id_servicio, fecha)
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]
