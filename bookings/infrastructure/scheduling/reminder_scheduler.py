"""Planificador diario del barrido de recordatorios."""

import asyncio
import logging
from datetime import datetime, time, timedelta, timezone
from typing import Awaitable, Callable
from uuid import uuid4

from bookings.application.interfaces.clock import Clock

logger = logging.getLogger(__name__)


class ReminderScheduler:
    """
    Ejecuta el barrido de recordatorios una vez al día a una hora fija.

    Características:
    - Hora de pared en la zona del reloj (por defecto 08:00, Europe/Madrid)
    - Los barridos nunca se solapan
    - Un barrido fallido se registra y el bucle continúa
    - Graceful shutdown
    """

    def __init__(
        self,
        run_scan: Callable[[], Awaitable[int]],
        clock: Clock,
        run_at: time = time(8, 0),
        scheduler_id: str | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Args:
            run_scan: Función async que ejecuta un barrido y retorna los recordatorios enviados.
            clock: Servicio de reloj; su zona horaria define la hora de ejecución.
            run_at: Hora local del barrido diario.
            scheduler_id: Identificador del planificador (auto-generado si no se provee).
            sleep: Función de espera, inyectable para tests.
        """
        self._run_scan = run_scan
        self._clock = clock
        self._run_at = run_at
        self._scheduler_id = scheduler_id or f"reminders-{uuid4().hex[:8]}"
        self._sleep = sleep
        self._running = False
        self._scan_lock = asyncio.Lock()

    @property
    def scheduler_id(self) -> str:
        return self._scheduler_id

    @property
    def is_running(self) -> bool:
        return self._running

    def next_run_after(self, now: datetime) -> datetime:
        target = now.replace(
            hour=self._run_at.hour,
            minute=self._run_at.minute,
            second=0,
            microsecond=0,
        )
        if target <= now:
            target += timedelta(days=1)
        return target

    def seconds_until_next_run(self) -> float:
        # En UTC: restar en hora de pared falla en los cambios de horario.
        now = self._clock.now()
        target = self.next_run_after(now)
        delay = target.astimezone(timezone.utc) - now.astimezone(timezone.utc)
        return max(delay.total_seconds(), 0.0)

    async def run_once(self) -> int:
        """Ejecuta un barrido, esperando a que termine cualquier otro en curso."""
        async with self._scan_lock:
            sent = await self._run_scan()
        logger.info(
            "Reminder scan completed",
            extra={"scheduler_id": self._scheduler_id, "sent": sent},
        )
        return sent

    async def start(self) -> None:
        """Inicia el bucle diario."""
        self._running = True
        logger.info(f"ReminderScheduler {self._scheduler_id} iniciado")

        while self._running:
            await self._sleep(self.seconds_until_next_run())
            if not self._running:
                break
            try:
                await self.run_once()
            except Exception as e:
                logger.exception(f"Error en barrido de recordatorios: {e}")

    async def stop(self) -> None:
        """Detiene el planificador de forma graceful."""
        self._running = False
        logger.info(f"ReminderScheduler {self._scheduler_id} detenido")
