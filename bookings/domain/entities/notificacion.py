"""Entidad Notificacion - mensaje interno persistido."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from bookings.domain.errors import InvalidRecipientError


class TipoNotificacion(str, Enum):
    INFORMACION = "INFORMACION"
    ADVERTENCIA = "ADVERTENCIA"
    ERROR = "ERROR"


class RecipientKind(str, Enum):
    """Tipo de destinatario: un cliente o el empresario de una empresa."""

    CLIENTE = "CLIENTE"
    EMPRESARIO = "EMPRESARIO"


@dataclass
class Notificacion:
    """
    Notificación dirigida a un único destinatario.

    Nunca se modifica una vez guardada.
    """

    mensaje: str
    tipo: TipoNotificacion
    dni_cliente: str | None = None
    dni_empresario: str | None = None
    id_notificacion: int | None = None
    fecha_alta: datetime | None = None

    def __post_init__(self) -> None:
        if (self.dni_cliente is None) == (self.dni_empresario is None):
            raise InvalidRecipientError()
        self.tipo = TipoNotificacion(self.tipo)

    @property
    def es_para_cliente(self) -> bool:
        return self.dni_cliente is not None

    @property
    def es_para_empresario(self) -> bool:
        return self.dni_empresario is not None

    @property
    def recipient_kind(self) -> RecipientKind:
        return RecipientKind.CLIENTE if self.es_para_cliente else RecipientKind.EMPRESARIO
