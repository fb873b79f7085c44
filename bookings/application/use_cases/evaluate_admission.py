import logging

from bookings.application.interfaces.directories import ServiceDirectory
from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.domain.admission import AdmissionCandidate, AdmissionDecision, decide


class AdmissionRule:
    """
    Evalúa la regla de admisión contra el catálogo y el libro de reservas.

    Resuelve el servicio y el recuento, y delega el orden de las comprobaciones
    en ``decide``. Para que la decisión siga siendo válida al insertar, el
    llamante debe invocarla mientras mantiene el ``CapacityLock`` de
    (servicio, fecha).
    """

    def __init__(self, service_directory: ServiceDirectory, reserva_repo: ReservaRepo) -> None:
        self._services = service_directory
        self._reserva_repo = reserva_repo
        self._logger = logging.getLogger(__name__)

    async def evaluate(self, candidate: AdmissionCandidate) -> AdmissionDecision:
        servicio = await self._services.find_by_id(candidate.id_servicio)
        current = 0
        if servicio is not None:
            current = await self._reserva_repo.count_by_servicio_and_fecha(
                candidate.id_servicio,
                candidate.fecha,
                exclude_id=candidate.excluding_reserva_id,
            )

        decision = decide(servicio, candidate, current)
        if not decision.accepted:
            self._logger.info(
                "Admission rejected",
                extra={
                    "id_servicio": candidate.id_servicio,
                    "fecha": candidate.fecha.isoformat(),
                    "hora": candidate.hora.isoformat(),
                    "reason": decision.reason.code,
                },
            )
        return decision
