"""
Libro de reservas sobre SQLite real.

Cada sesión abre su propia conexión al fichero, así que las admisiones
concurrentes compiten por los mismos bloqueos que en producción.
"""

import asyncio
from datetime import time, timedelta

import pytest

from bookings.api.dependencies import build_use_cases
from bookings.application.interfaces.clock import FakeClock
from bookings.application.use_cases.create_reserva import CreateReservaCommand
from bookings.domain.entities import RecipientKind, ReservaUpdate, TipoNotificacion
from bookings.domain.errors import AdmissionRejectedError, ReservaNotFoundError
from bookings.infrastructure.db.repositories import (
    ClientDirectorySQL,
    CompanyDirectorySQL,
    NotificacionRepoSQL,
    ReservaRepoSQL,
    SQLCapacityLock,
    ServiceDirectorySQL,
)
from bookings.infrastructure.db.retry import retry_on_deadlock
from bookings.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from bookings.infrastructure.in_memory import RecordingEmailGateway
from tests.factories import (
    CIF,
    DNI_ANA,
    DNI_EMPRESARIO,
    DNI_LUIS,
    MASAJE,
    MONDAY,
    NOW,
    OTHER_CIF,
    PELUQUERIA,
    SIN_HORARIO,
    TUESDAY,
)

pytestmark = pytest.mark.integration


def _sql_use_cases(session, email=None):
    return build_use_cases(
        reserva_repo=ReservaRepoSQL(session),
        notificacion_repo=NotificacionRepoSQL(session),
        client_directory=ClientDirectorySQL(session),
        company_directory=CompanyDirectorySQL(session),
        service_directory=ServiceDirectorySQL(session),
        capacity_lock=SQLCapacityLock(session),
        tx_manager=SQLAlchemyTransactionManager(session),
        email_gateway=email or RecordingEmailGateway(),
        clock=FakeClock(NOW),
    )


def _command(dni=DNI_ANA, id_servicio=PELUQUERIA, fecha=MONDAY, hora=time(10, 0)):
    return CreateReservaCommand(
        dni_cliente=dni,
        identificador_fiscal_empresa=CIF,
        id_servicio=id_servicio,
        fecha_reserva=fecha,
        hora=hora,
        estado="PENDIENTE",
    )


class TestSQLDirectories:
    @pytest.mark.asyncio
    async def test_cliente_and_empresa_lookup(self, db_session):
        clients = ClientDirectorySQL(db_session)
        companies = CompanyDirectorySQL(db_session)

        assert await clients.exists(DNI_ANA)
        assert not await clients.exists("00000000Z")
        cliente = await clients.find_full(DNI_ANA)
        assert cliente.email == "ana@example.com"

        empresa = await companies.find_full(CIF)
        assert empresa.empresario.dni == DNI_EMPRESARIO
        assert await companies.find_full("X0000000") is None

        otra = await companies.find_full(OTHER_CIF)
        assert otra.nombre == "Otra"
        assert otra.empresario is None

    @pytest.mark.asyncio
    async def test_service_with_horarios(self, db_session):
        services = ServiceDirectorySQL(db_session)

        peluqueria = await services.find_by_id(PELUQUERIA)
        assert peluqueria.limite_reservas == 1
        assert peluqueria.has_schedule
        assert peluqueria.horarios[0].applies_on(TUESDAY)

        consulta = await services.find_by_id(SIN_HORARIO)
        assert not consulta.has_schedule
        assert await services.find_by_id(999) is None


class TestSQLReservaFlow:
    @pytest.mark.asyncio
    async def test_create_list_update_cancel(self, db_session):
        email = RecordingEmailGateway()
        use_cases = _sql_use_cases(db_session, email)

        reserva = await use_cases["create_reserva"].execute(_command())
        assert reserva.id_reserva is not None

        stored = await use_cases["get_reserva"].execute(reserva.id_reserva)
        assert stored.nombre_servicio == "Corte de pelo"
        assert stored.hora == time(10, 0)
        assert await use_cases["get_reserva"].execute(reserva.id_reserva) == stored

        with pytest.raises(AdmissionRejectedError):
            await use_cases["create_reserva"].execute(_command(dni=DNI_LUIS, hora=time(11, 0)))

        await use_cases["update_reserva"].execute(reserva.id_reserva, ReservaUpdate(estado="CONFIRMADA"))
        assert (await use_cases["get_reserva"].execute(reserva.id_reserva)).estado == "CONFIRMADA"

        listed = await use_cases["list_by_empresa"].execute(CIF)
        assert [r.id_reserva for r in listed] == [reserva.id_reserva]

        await use_cases["cancel_reserva"].execute(reserva.id_reserva)
        with pytest.raises(ReservaNotFoundError):
            await use_cases["get_reserva"].execute(reserva.id_reserva)

        notificaciones = await use_cases["list_notificaciones"].by_cliente(DNI_ANA)
        assert [n.tipo for n in notificaciones] == [
            TipoNotificacion.INFORMACION,
            TipoNotificacion.INFORMACION,
            TipoNotificacion.ADVERTENCIA,
        ]
        assert len(email.sent) == 3

    @pytest.mark.asyncio
    async def test_rejected_update_leaves_row(self, db_session):
        use_cases = _sql_use_cases(db_session)
        first = await use_cases["create_reserva"].execute(_command(fecha=MONDAY))
        await use_cases["create_reserva"].execute(_command(dni=DNI_LUIS, fecha=TUESDAY))

        with pytest.raises(AdmissionRejectedError):
            await use_cases["update_reserva"].execute(first.id_reserva, ReservaUpdate(fecha_reserva=TUESDAY))

        assert (await use_cases["get_reserva"].execute(first.id_reserva)).fecha_reserva == MONDAY

    @pytest.mark.asyncio
    async def test_bulk_cancel_counts(self, db_session):
        use_cases = _sql_use_cases(db_session)
        for dni in (DNI_ANA, DNI_ANA, DNI_LUIS):
            await use_cases["create_reserva"].execute(_command(dni=dni, id_servicio=MASAJE))

        assert await use_cases["cancel_by_cliente"].execute(DNI_ANA) == 2
        assert await use_cases["cancel_by_empresa"].execute(CIF) == 1

    @pytest.mark.asyncio
    async def test_reminders_and_empresario_notifications(self, db_session):
        use_cases = _sql_use_cases(db_session)
        await use_cases["create_reserva"].execute(_command(fecha=MONDAY))
        await use_cases["create_reserva"].execute(_command(dni=DNI_LUIS, fecha=MONDAY + timedelta(days=10)))

        assert await use_cases["send_reminders"].run() == 1

        result = await use_cases["dispatcher"].notify(
            RecipientKind.EMPRESARIO, CIF, "Resumen diario", TipoNotificacion.INFORMACION
        )
        stored = await use_cases["get_notificacion"].execute(result.notificacion.id_notificacion)
        assert stored.dni_empresario == DNI_EMPRESARIO
        assert stored.fecha_alta == NOW

        await use_cases["delete_notificacion"].execute(stored.id_notificacion)
        assert await use_cases["list_notificaciones"].by_empresario(DNI_EMPRESARIO) == []


@pytest.mark.concurrency
class TestSQLConcurrentAdmission:
    @pytest.mark.asyncio
    async def test_limit_holds_across_connections(self, session_maker):
        async def attempt(dni):
            async def create():
                async with session_maker() as session:
                    return await _sql_use_cases(session)["create_reserva"].execute(
                        _command(dni=dni, id_servicio=MASAJE)
                    )

            try:
                return await retry_on_deadlock(create, max_attempts=5, base_delay=0.05)
            except AdmissionRejectedError:
                return None

        results = await asyncio.gather(*[attempt(dni) for dni in [DNI_ANA, DNI_LUIS] * 3])

        assert len([r for r in results if r is not None]) == 3
        async with session_maker() as session:
            count = await ReservaRepoSQL(session).count_by_servicio_and_fecha(MASAJE, MONDAY)
        assert count == 3
