from datetime import time

import pytest

from bookings.application.use_cases.create_reserva import CreateReservaCommand
from bookings.domain.entities import TipoNotificacion
from bookings.domain.errors import BadRequestError, ReservaNotFoundError
from tests.factories import CIF, DNI_ANA, DNI_LUIS, MASAJE, MONDAY, OTHER_CIF, PELUQUERIA, TUESDAY


async def _book(ledger, dni, fecha, id_servicio=MASAJE):
    return await ledger["create_reserva"].execute(
        CreateReservaCommand(
            dni_cliente=dni,
            identificador_fiscal_empresa=CIF,
            id_servicio=id_servicio,
            fecha_reserva=fecha,
            hora=time(10, 0),
            estado="CONFIRMADA",
        )
    )


class TestCancelReserva:
    @pytest.mark.asyncio
    async def test_cancel_removes_row_and_warns_client(self, ledger):
        reserva = await _book(ledger, DNI_ANA, MONDAY)
        ledger.email.sent.clear()

        await ledger["cancel_reserva"].execute(reserva.id_reserva)

        assert await ledger.reservas.get_by_id(reserva.id_reserva) is None
        last = (await ledger.notificaciones.list_by_cliente(DNI_ANA))[-1]
        assert last.tipo == TipoNotificacion.ADVERTENCIA
        assert last.mensaje == "Se ha cancelado su reserva para el día 2026-10-19 a las 10:00:00."
        assert [e.subject for e in ledger.email.sent] == ["⚠️ Acción requerida - SomPoble"]

    @pytest.mark.asyncio
    async def test_cancel_frees_capacity(self, ledger):
        reserva = await _book(ledger, DNI_ANA, MONDAY, id_servicio=PELUQUERIA)
        await ledger["cancel_reserva"].execute(reserva.id_reserva)
        again = await _book(ledger, DNI_LUIS, MONDAY, id_servicio=PELUQUERIA)
        assert again.id_reserva != reserva.id_reserva

    @pytest.mark.asyncio
    async def test_unknown_reserva(self, ledger):
        with pytest.raises(ReservaNotFoundError):
            await ledger["cancel_reserva"].execute(123)


class TestBulkCancel:
    @pytest.mark.asyncio
    async def test_by_cliente_sends_single_summary(self, ledger):
        await _book(ledger, DNI_ANA, MONDAY)
        await _book(ledger, DNI_ANA, MONDAY)
        await _book(ledger, DNI_LUIS, MONDAY)
        before = len(await ledger.notificaciones.list_by_cliente(DNI_ANA))

        deleted = await ledger["cancel_by_cliente"].execute(DNI_ANA)

        assert deleted == 2
        assert await ledger.reservas.list_by_cliente(DNI_ANA) == []
        assert len(await ledger.reservas.list_by_cliente(DNI_LUIS)) == 1
        notificaciones = await ledger.notificaciones.list_by_cliente(DNI_ANA)
        assert len(notificaciones) == before + 1
        assert notificaciones[-1].mensaje == "Se han cancelado todas sus reservas."

    @pytest.mark.asyncio
    async def test_by_cliente_unknown(self, ledger):
        with pytest.raises(BadRequestError) as exc_info:
            await ledger["cancel_by_cliente"].execute("00000000Z")
        assert exc_info.value.code == "CLIENTE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_by_empresa_without_notifications(self, ledger):
        await _book(ledger, DNI_ANA, MONDAY)
        await _book(ledger, DNI_LUIS, TUESDAY, id_servicio=PELUQUERIA)
        before = len(ledger.notificaciones.notificaciones)

        deleted = await ledger["cancel_by_empresa"].execute(CIF)

        assert deleted == 2
        assert ledger.reservas.reservas == {}
        assert len(ledger.notificaciones.notificaciones) == before

    @pytest.mark.asyncio
    async def test_by_empresa_with_no_bookings(self, ledger):
        assert await ledger["cancel_by_empresa"].execute(OTHER_CIF) == 0

    @pytest.mark.asyncio
    async def test_by_empresa_unknown(self, ledger):
        with pytest.raises(BadRequestError):
            await ledger["cancel_by_empresa"].execute("X0000000")
