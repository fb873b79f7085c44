import logging
from dataclasses import dataclass
from datetime import date, time

from bookings.application.interfaces.capacity_lock import CapacityLock
from bookings.application.interfaces.directories import (
    ClientDirectory,
    CompanyDirectory,
    ServiceDirectory,
)
from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.application.interfaces.transaction_manager import TransactionManager
from bookings.application.use_cases.evaluate_admission import AdmissionRule
from bookings.application.use_cases.notify import NotificationDispatcher
from bookings.domain.admission import AdmissionCandidate
from bookings.domain.entities.notificacion import RecipientKind, TipoNotificacion
from bookings.domain.entities.reserva import Reserva
from bookings.domain.errors import (
    ClienteNotFoundError,
    EmpresaNotFoundError,
    MissingFieldsError,
    ServicioEmpresaMismatchError,
    ServicioNotFoundError,
)


@dataclass
class CreateReservaCommand:
    dni_cliente: str
    identificador_fiscal_empresa: str
    id_servicio: int
    fecha_reserva: date | None
    hora: time | None
    estado: str | None

    def missing_fields(self) -> list[str]:
        return [name for name in ("fecha_reserva", "hora", "estado") if getattr(self, name) is None]


class CreateReservaUseCase:
    def __init__(
        self,
        reserva_repo: ReservaRepo,
        client_directory: ClientDirectory,
        company_directory: CompanyDirectory,
        service_directory: ServiceDirectory,
        admission_rule: AdmissionRule,
        capacity_lock: CapacityLock,
        transaction_manager: TransactionManager,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self._reserva_repo = reserva_repo
        self._clients = client_directory
        self._companies = company_directory
        self._services = service_directory
        self._admission_rule = admission_rule
        self._capacity_lock = capacity_lock
        self._transaction_manager = transaction_manager
        self._dispatcher = dispatcher
        self._logger = logging.getLogger(__name__)

    async def execute(self, command: CreateReservaCommand) -> Reserva:
        async with self._transaction_manager.start():
            if not await self._clients.exists(command.dni_cliente):
                raise ClienteNotFoundError(command.dni_cliente)
            if not await self._companies.exists(command.identificador_fiscal_empresa):
                raise EmpresaNotFoundError(command.identificador_fiscal_empresa)

            servicio = await self._services.find_by_id(command.id_servicio)
            if servicio is None:
                raise ServicioNotFoundError(command.id_servicio)
            if not servicio.belongs_to(command.identificador_fiscal_empresa):
                raise ServicioEmpresaMismatchError(
                    command.id_servicio, command.identificador_fiscal_empresa
                )

            missing = command.missing_fields()
            if missing:
                raise MissingFieldsError(missing)

            async with self._capacity_lock.hold(command.id_servicio, command.fecha_reserva):
                decision = await self._admission_rule.evaluate(
                    AdmissionCandidate(
                        id_servicio=command.id_servicio,
                        fecha=command.fecha_reserva,
                        hora=command.hora,
                    )
                )
                decision.raise_if_rejected()

                reserva = await self._reserva_repo.create(
                    Reserva(
                        fecha_reserva=command.fecha_reserva,
                        hora=command.hora,
                        estado=command.estado,
                        dni_cliente=command.dni_cliente,
                        identificador_fiscal_empresa=command.identificador_fiscal_empresa,
                        id_servicio=command.id_servicio,
                        nombre_servicio=servicio.nombre,
                    )
                )

        self._logger.info(
            "Reserva created",
            extra={
                "id_reserva": reserva.id_reserva,
                "id_servicio": reserva.id_servicio,
                "fecha": reserva.fecha_reserva.isoformat(),
            },
        )
        await self._dispatcher.notify_after_commit(
            RecipientKind.CLIENTE,
            reserva.dni_cliente,
            f"Se ha realizado una nueva reserva para el servicio '{servicio.nombre}' "
            f"el día {reserva.fecha_reserva.isoformat()} a las {reserva.hora.isoformat()}.",
            TipoNotificacion.INFORMACION,
        )
        return reserva
