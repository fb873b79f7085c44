from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from bookings.domain.entities.notificacion import Notificacion, TipoNotificacion


class NotificacionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id_notificacion: int = Field(alias="idNotificacion")
    dni_cliente: str | None = Field(default=None, alias="dniCliente")
    dni_empresario: str | None = Field(default=None, alias="dniEmpresario")
    mensaje: str
    tipo: TipoNotificacion
    fecha_alta: datetime | None = Field(default=None, alias="fechaAlta")

    @classmethod
    def from_entity(cls, notificacion: Notificacion) -> "NotificacionResponse":
        return cls(
            id_notificacion=notificacion.id_notificacion,
            dni_cliente=notificacion.dni_cliente,
            dni_empresario=notificacion.dni_empresario,
            mensaje=notificacion.mensaje,
            tipo=notificacion.tipo,
            fecha_alta=notificacion.fecha_alta,
        )


class ReminderRunResponse(BaseModel):
    sent: int
