"""
Circuit Breaker para el envío de emails.

Si el servidor SMTP falla repetidamente, el circuito se abre y los envíos
fallan de inmediato durante ``reset_timeout`` segundos en lugar de bloquear
un hilo hasta el timeout de conexión. Las notificaciones se siguen guardando.

Estados:
- CLOSED: Operación normal
- OPEN: Demasiados fallos, las llamadas fallan inmediatamente
- HALF_OPEN: Se deja pasar una llamada de prueba
"""

import logging

from pybreaker import CircuitBreaker, CircuitBreakerError, CircuitBreakerListener

logger = logging.getLogger(__name__)


email_breaker = CircuitBreaker(
    fail_max=5,
    reset_timeout=60,
    name="email_circuit_breaker",
)


class StateChangeLogger(CircuitBreakerListener):
    """Registra en el log los cambios de estado del circuito."""

    def __init__(self, name: str):
        self.name = name

    def state_change(self, cb, old_state, new_state):
        logger.warning(
            "Circuit breaker state changed",
            extra={
                "breaker_name": self.name,
                "old_state": old_state.name if old_state else None,
                "new_state": new_state.name,
            },
        )


email_breaker.add_listener(StateChangeLogger("email"))


__all__ = [
    "email_breaker",
    "CircuitBreakerError",
]
