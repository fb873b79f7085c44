import logging

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
from bookings.domain.entities.reserva import Reserva, ReservaUpdate
from bookings.domain.errors import (
    ClienteNotFoundError,
    EmpresaNotFoundError,
    ReservaNotFoundError,
    ServicioEmpresaMismatchError,
    ServicioNotFoundError,
)


class UpdateReservaUseCase:
    """
    Actualización parcial de una reserva.

    Una actualización sin campos devuelve la reserva tal cual, sin notificar.
    En otro caso la regla de admisión se vuelve a evaluar sobre el resultado. La
    reserva editada sólo se descuenta del recuento si mantiene servicio y fecha;
    si se mueve, compite por las plazas del nuevo día como una reserva más.
    """

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

    async def execute(self, id_reserva: int, changes: ReservaUpdate) -> Reserva:
        async with self._transaction_manager.start():
            original = await self._reserva_repo.get_by_id(id_reserva)
            if original is None:
                raise ReservaNotFoundError(id_reserva)
            if changes.is_empty:
                return original

            if changes.dni_cliente is not None and not await self._clients.exists(
                changes.dni_cliente
            ):
                raise ClienteNotFoundError(changes.dni_cliente)
            if changes.identificador_fiscal_empresa is not None and not await self._companies.exists(
                changes.identificador_fiscal_empresa
            ):
                raise EmpresaNotFoundError(changes.identificador_fiscal_empresa)

            updated = original.apply(changes)
            servicio_changed = updated.id_servicio != original.id_servicio
            empresa_changed = (
                updated.identificador_fiscal_empresa != original.identificador_fiscal_empresa
            )
            if servicio_changed or empresa_changed:
                servicio = await self._services.find_by_id(updated.id_servicio)
                if servicio is None:
                    raise ServicioNotFoundError(updated.id_servicio)
                if not servicio.belongs_to(updated.identificador_fiscal_empresa):
                    raise ServicioEmpresaMismatchError(
                        updated.id_servicio, updated.identificador_fiscal_empresa
                    )
                updated.nombre_servicio = servicio.nombre

            same_bucket = updated.capacity_key == original.capacity_key
            async with self._capacity_lock.hold(updated.id_servicio, updated.fecha_reserva):
                decision = await self._admission_rule.evaluate(
                    AdmissionCandidate(
                        id_servicio=updated.id_servicio,
                        fecha=updated.fecha_reserva,
                        hora=updated.hora,
                        excluding_reserva_id=id_reserva if same_bucket else None,
                    )
                )
                decision.raise_if_rejected()
                await self._reserva_repo.update(updated)

        self._logger.info(
            "Reserva updated",
            extra={
                "id_reserva": id_reserva,
                "fields": sorted(changes.changes()),
            },
        )
        await self._dispatcher.notify_after_commit(
            RecipientKind.CLIENTE,
            updated.dni_cliente,
            f"Se ha actualizado su reserva para el día {updated.fecha_reserva.isoformat()} "
            f"a las {updated.hora.isoformat()}.",
            TipoNotificacion.INFORMACION,
        )
        return updated
