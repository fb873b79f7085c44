import asyncio
import logging
from datetime import timedelta

from bookings.application.interfaces.clock import Clock
from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.application.interfaces.transaction_manager import TransactionManager
from bookings.application.use_cases.notify import NotificationDispatcher
from bookings.domain.entities.notificacion import RecipientKind, TipoNotificacion
from bookings.domain.entities.reserva import Reserva

logger = logging.getLogger(__name__)

# Compartido por el planificador y el endpoint del worker del mismo proceso.
reminder_scan_lock = asyncio.Lock()


def reminder_message(reserva: Reserva) -> str:
    servicio = reserva.nombre_servicio or f"#{reserva.id_servicio}"
    return (
        f"Recordatorio: Su reserva está próxima. Tiene una reserva de '{servicio}' "
        f"el día {reserva.fecha_reserva.isoformat()} a las {reserva.hora.isoformat()}."
    )


class ReminderScanner:
    """
    Envía un recordatorio por cada reserva de hoy o de los próximos días.

    La ventana es [hoy, hoy + window_days] en hora local del reloj. Cada reserva
    se notifica de forma independiente: un fallo con una no detiene al resto.
    Dos barridos del mismo proceso nunca se solapan.
    """

    def __init__(
        self,
        reserva_repo: ReservaRepo,
        dispatcher: NotificationDispatcher,
        clock: Clock,
        transaction_manager: TransactionManager,
        window_days: int = 1,
        scan_lock: asyncio.Lock | None = None,
    ) -> None:
        self._reserva_repo = reserva_repo
        self._dispatcher = dispatcher
        self._clock = clock
        self._transaction_manager = transaction_manager
        self._window_days = window_days
        self._scan_lock = scan_lock or reminder_scan_lock

    async def run(self) -> int:
        """
        Returns:
            Número de recordatorios registrados (con o sin email entregado).
        """
        async with self._scan_lock:
            return await self._scan()

    async def _scan(self) -> int:
        today = self._clock.today()
        until = today + timedelta(days=self._window_days)
        async with self._transaction_manager.start():
            upcoming = await self._reserva_repo.list_between(today, until)

        dispatched = 0
        delivered = 0
        for reserva in upcoming:
            result = await self._dispatcher.notify_after_commit(
                RecipientKind.CLIENTE,
                reserva.dni_cliente,
                reminder_message(reserva),
                TipoNotificacion.ADVERTENCIA,
            )
            if result is None:
                continue
            dispatched += 1
            if result.delivered:
                delivered += 1

        logger.info(
            "Reminder scan finished",
            extra={
                "desde": today.isoformat(),
                "hasta": until.isoformat(),
                "found": len(upcoming),
                "dispatched": dispatched,
                "delivered": delivered,
            },
        )
        return dispatched
