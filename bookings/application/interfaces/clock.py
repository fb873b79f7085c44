"""Interface Clock - Puerto para abstracción de tiempo."""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Europe/Madrid"


class Clock(ABC):
    """
    Puerto para abstracción del tiempo del sistema.

    Las reservas se expresan en hora local de la empresa, por lo que el reloj
    devuelve siempre datetimes con zona horaria.
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Retorna la fecha/hora actual.

        Returns:
            datetime timezone-aware en la zona configurada.
        """
        raise NotImplementedError

    def today(self) -> date:
        """Retorna la fecha local actual."""
        return self.now().date()


class SystemClock(Clock):
    """Implementación real que usa el reloj del sistema."""

    def __init__(self, tz: str | tzinfo = DEFAULT_TIMEZONE):
        self._tz = ZoneInfo(tz) if isinstance(tz, str) else tz

    def now(self) -> datetime:
        return datetime.now(self._tz)


class FakeClock(Clock):
    """
    Implementación fake para testing.

    Permite fijar el tiempo para pruebas deterministas.
    """

    def __init__(self, fixed_time: datetime | None = None, tz: str = DEFAULT_TIMEZONE):
        """
        Args:
            fixed_time: Tiempo fijo a retornar. Si no tiene zona, se asume ``tz``.
            tz: Zona horaria usada cuando ``fixed_time`` es naive o None.
        """
        self._tz = ZoneInfo(tz)
        self._fixed_time = self._localize(fixed_time or datetime.now(self._tz))

    def _localize(self, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=self._tz)
        return value

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = self._localize(new_time)

    def advance(self, seconds: int = 0, minutes: int = 0, hours: int = 0, days: int = 0) -> None:
        delta = timedelta(seconds=seconds, minutes=minutes, hours=hours, days=days)
        # Tiempo transcurrido real, también en los cambios de horario.
        self._fixed_time = (self._fixed_time.astimezone(timezone.utc) + delta).astimezone(self._tz)
