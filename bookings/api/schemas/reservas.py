from datetime import date, time

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

from bookings.application.use_cases.create_reserva import CreateReservaCommand
from bookings.domain.entities.reserva import Reserva, ReservaUpdate

Dni = constr(strip_whitespace=True, min_length=1, max_length=20)
Estado = constr(strip_whitespace=True, min_length=1, max_length=50)


def _local_time(value: time | None) -> time | None:
    # Los horarios son hora local de la empresa, sin zona.
    if value is not None and value.tzinfo is not None:
        raise ValueError("hora must be a local time without UTC offset")
    return value


class CreateReservaRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    dni_cliente: Dni = Field(alias="dniCliente")
    identificador_fiscal_empresa: Dni = Field(alias="identificadorFiscalEmpresa")
    id_servicio: int = Field(alias="idServicio")
    # Opcionales en el esquema: la ausencia se informa como MISSING_FIELDS tras
    # comprobar cliente, empresa y servicio.
    fecha_reserva: date | None = Field(default=None, alias="fechaReserva")
    hora: time | None = None
    estado: Estado | None = None

    @field_validator("hora")
    @classmethod
    def validate_hora(cls, value: time | None) -> time | None:
        return _local_time(value)

    def to_command(self) -> CreateReservaCommand:
        return CreateReservaCommand(
            dni_cliente=self.dni_cliente,
            identificador_fiscal_empresa=self.identificador_fiscal_empresa,
            id_servicio=self.id_servicio,
            fecha_reserva=self.fecha_reserva,
            hora=self.hora,
            estado=self.estado,
        )


class UpdateReservaRequest(BaseModel):
    """Actualización parcial: los campos ausentes o nulos no se modifican."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    fecha_reserva: date | None = Field(default=None, alias="fechaReserva")
    hora: time | None = None
    estado: Estado | None = None
    dni_cliente: Dni | None = Field(default=None, alias="dniCliente")
    identificador_fiscal_empresa: Dni | None = Field(default=None, alias="identificadorFiscalEmpresa")
    id_servicio: int | None = Field(default=None, alias="idServicio")

    @field_validator("hora")
    @classmethod
    def validate_hora(cls, value: time | None) -> time | None:
        return _local_time(value)

    def to_update(self) -> ReservaUpdate:
        return ReservaUpdate(
            fecha_reserva=self.fecha_reserva,
            hora=self.hora,
            estado=self.estado,
            dni_cliente=self.dni_cliente,
            identificador_fiscal_empresa=self.identificador_fiscal_empresa,
            id_servicio=self.id_servicio,
        )


class CreateReservaResponse(BaseModel):
    id: int


class MessageResponse(BaseModel):
    message: str


class CancelledReservasResponse(BaseModel):
    message: str
    deleted: int


class ReservaResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id_reserva: int = Field(alias="idReserva")
    fecha_reserva: date = Field(alias="fechaReserva")
    hora: time
    estado: str
    dni_cliente: str = Field(alias="dniCliente")
    identificador_fiscal_empresa: str = Field(alias="identificadorFiscalEmpresa")
    id_servicio: int = Field(alias="idServicio")
    nombre_servicio: str | None = Field(default=None, alias="nombreServicio")

    @classmethod
    def from_entity(cls, reserva: Reserva) -> "ReservaResponse":
        return cls(
            id_reserva=reserva.id_reserva,
            fecha_reserva=reserva.fecha_reserva,
            hora=reserva.hora,
            estado=reserva.estado,
            dni_cliente=reserva.dni_cliente,
            identificador_fiscal_empresa=reserva.identificador_fiscal_empresa,
            id_servicio=reserva.id_servicio,
            nombre_servicio=reserva.nombre_servicio,
        )
