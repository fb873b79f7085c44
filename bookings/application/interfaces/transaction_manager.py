from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Protocol


class TransactionManager(Protocol):
    """Delimita una unidad de trabajo: todo lo ejecutado dentro se confirma junto."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
