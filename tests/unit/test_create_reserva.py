from datetime import time

import pytest

from bookings.application.use_cases.create_reserva import CreateReservaCommand
from bookings.domain.entities import TipoNotificacion
from bookings.domain.errors import (
    AdmissionRejectedError,
    ClienteNotFoundError,
    EmpresaNotFoundError,
    MissingFieldsError,
    ServicioEmpresaMismatchError,
    ServicioNotFoundError,
)
from tests.factories import (
    AJENO,
    CIF,
    DNI_ANA,
    DNI_LUIS,
    MASAJE,
    MONDAY,
    PELUQUERIA,
    SATURDAY,
    SIN_HORARIO,
)


def _command(**overrides) -> CreateReservaCommand:
    values = {
        "dni_cliente": DNI_ANA,
        "identificador_fiscal_empresa": CIF,
        "id_servicio": PELUQUERIA,
        "fecha_reserva": MONDAY,
        "hora": time(10, 0),
        "estado": "CONFIRMADA",
    }
    values.update(overrides)
    return CreateReservaCommand(**values)


class TestCreateReserva:
    @pytest.mark.asyncio
    async def test_limit_one_second_booking_same_day_rejected(self, ledger):
        """Límite 1: la primera reserva del lunes entra, la segunda no."""
        first = await ledger["create_reserva"].execute(_command())
        assert first.id_reserva is not None
        assert first.nombre_servicio == "Corte de pelo"

        with pytest.raises(AdmissionRejectedError) as exc_info:
            await ledger["create_reserva"].execute(_command(dni_cliente=DNI_LUIS, hora=time(12, 0)))
        assert exc_info.value.code == "CAPACITY_REACHED"
        assert len(ledger.reservas.reservas) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "hora,accepted",
        [(time(8, 59), False), (time(9, 0), True), (time(17, 59), True), (time(18, 0), False)],
    )
    async def test_schedule_boundaries(self, ledger, hora, accepted):
        command = _command(id_servicio=MASAJE, hora=hora)
        if accepted:
            reserva = await ledger["create_reserva"].execute(command)
            assert reserva.hora == hora
        else:
            with pytest.raises(AdmissionRejectedError) as exc_info:
                await ledger["create_reserva"].execute(command)
            assert exc_info.value.code == "OUTSIDE_SCHEDULE"

    @pytest.mark.asyncio
    async def test_weekend_rejected(self, ledger):
        with pytest.raises(AdmissionRejectedError) as exc_info:
            await ledger["create_reserva"].execute(_command(fecha_reserva=SATURDAY))
        assert exc_info.value.code == "OUTSIDE_SCHEDULE"

    @pytest.mark.asyncio
    async def test_service_without_schedule(self, ledger):
        with pytest.raises(AdmissionRejectedError) as exc_info:
            await ledger["create_reserva"].execute(_command(id_servicio=SIN_HORARIO))
        assert exc_info.value.code == "SCHEDULE_UNDEFINED"

    @pytest.mark.asyncio
    async def test_sends_confirmation_notification(self, ledger):
        await ledger["create_reserva"].execute(_command())

        notificaciones = await ledger.notificaciones.list_by_cliente(DNI_ANA)
        assert len(notificaciones) == 1
        assert notificaciones[0].tipo == TipoNotificacion.INFORMACION
        assert "Corte de pelo" in notificaciones[0].mensaje
        assert "2026-10-19" in notificaciones[0].mensaje
        assert ledger.email.sent[0].to == "ana@example.com"
        assert ledger.email.sent[0].subject == "Información sobre su reserva - SomPoble"

    @pytest.mark.asyncio
    async def test_email_failure_does_not_fail_booking(self, ledger):
        ledger.email.fail_with = "connection refused"

        reserva = await ledger["create_reserva"].execute(_command())

        assert reserva.id_reserva in ledger.reservas.reservas
        assert len(await ledger.notificaciones.list_by_cliente(DNI_ANA)) == 1
        assert ledger.email.attempts == 1
        assert ledger.email.sent == []


class TestCreateReservaValidation:
    """Las referencias se comprueban antes de la regla de admisión."""

    @pytest.mark.asyncio
    async def test_unknown_cliente(self, ledger):
        with pytest.raises(ClienteNotFoundError):
            await ledger["create_reserva"].execute(_command(dni_cliente="00000000Z", id_servicio=999))

    @pytest.mark.asyncio
    async def test_unknown_empresa(self, ledger):
        with pytest.raises(EmpresaNotFoundError):
            await ledger["create_reserva"].execute(_command(identificador_fiscal_empresa="X0000000"))

    @pytest.mark.asyncio
    async def test_unknown_servicio(self, ledger):
        with pytest.raises(ServicioNotFoundError):
            await ledger["create_reserva"].execute(_command(id_servicio=999))

    @pytest.mark.asyncio
    async def test_service_of_another_company(self, ledger):
        with pytest.raises(ServicioEmpresaMismatchError) as exc_info:
            await ledger["create_reserva"].execute(_command(id_servicio=AJENO))
        assert exc_info.value.code == "SERVICE_COMPANY_MISMATCH"

    @pytest.mark.asyncio
    async def test_missing_fields(self, ledger):
        with pytest.raises(MissingFieldsError) as exc_info:
            await ledger["create_reserva"].execute(_command(hora=None, estado=None))
        assert exc_info.value.fields == ["hora", "estado"]
        assert ledger.reservas.reservas == {}
        assert ledger.notificaciones.notificaciones == {}
