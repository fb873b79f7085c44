from fastapi import APIRouter, Depends, status

from bookings.api.dependencies import get_use_cases
from bookings.api.schemas.reservas import (
    CancelledReservasResponse,
    CreateReservaRequest,
    CreateReservaResponse,
    MessageResponse,
    ReservaResponse,
    UpdateReservaRequest,
)
from bookings.infrastructure.db.retry import retry_on_deadlock

router = APIRouter()


@router.post(
    "/reservas",
    response_model=CreateReservaResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_reserva(
    payload: CreateReservaRequest,
    use_cases=Depends(get_use_cases),
) -> CreateReservaResponse:
    command = payload.to_command()
    reserva = await retry_on_deadlock(lambda: use_cases["create_reserva"].execute(command))
    return CreateReservaResponse(id=reserva.id_reserva)


@router.put(
    "/reservas/{id_reserva}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def update_reserva(
    id_reserva: int,
    payload: UpdateReservaRequest,
    use_cases=Depends(get_use_cases),
) -> MessageResponse:
    changes = payload.to_update()
    await retry_on_deadlock(lambda: use_cases["update_reserva"].execute(id_reserva, changes))
    return MessageResponse(message="Reserva actualizada correctamente.")


@router.delete(
    "/reservas/clientes/{dni_cliente}",
    response_model=CancelledReservasResponse,
    status_code=status.HTTP_200_OK,
)
async def cancel_reservas_by_cliente(
    dni_cliente: str,
    use_cases=Depends(get_use_cases),
) -> CancelledReservasResponse:
    deleted = await use_cases["cancel_by_cliente"].execute(dni_cliente)
    return CancelledReservasResponse(
        message="Todas las reservas del cliente se eliminaron correctamente.",
        deleted=deleted,
    )


@router.delete(
    "/reservas/empresas/{identificador_fiscal}",
    response_model=CancelledReservasResponse,
    status_code=status.HTTP_200_OK,
)
async def cancel_reservas_by_empresa(
    identificador_fiscal: str,
    use_cases=Depends(get_use_cases),
) -> CancelledReservasResponse:
    deleted = await use_cases["cancel_by_empresa"].execute(identificador_fiscal)
    return CancelledReservasResponse(
        message="Todas las reservas de la empresa se eliminaron correctamente.",
        deleted=deleted,
    )


@router.delete(
    "/reservas/{id_reserva}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def cancel_reserva(
    id_reserva: int,
    use_cases=Depends(get_use_cases),
) -> MessageResponse:
    await use_cases["cancel_reserva"].execute(id_reserva)
    return MessageResponse(message="Reserva eliminada correctamente.")


@router.get(
    "/reservas/clientes/{dni_cliente}",
    response_model=list[ReservaResponse],
    status_code=status.HTTP_200_OK,
)
async def list_reservas_by_cliente(
    dni_cliente: str,
    use_cases=Depends(get_use_cases),
) -> list[ReservaResponse]:
    reservas = await use_cases["list_by_cliente"].execute(dni_cliente)
    return [ReservaResponse.from_entity(r) for r in reservas]


@router.get(
    "/reservas/empresas/{identificador_fiscal}",
    response_model=list[ReservaResponse],
    status_code=status.HTTP_200_OK,
)
async def list_reservas_by_empresa(
    identificador_fiscal: str,
    use_cases=Depends(get_use_cases),
) -> list[ReservaResponse]:
    reservas = await use_cases["list_by_empresa"].execute(identificador_fiscal)
    return [ReservaResponse.from_entity(r) for r in reservas]


@router.get(
    "/reservas/{id_reserva}",
    response_model=ReservaResponse,
    status_code=status.HTTP_200_OK,
)
async def get_reserva(
    id_reserva: int,
    use_cases=Depends(get_use_cases),
) -> ReservaResponse:
    reserva = await use_cases["get_reserva"].execute(id_reserva)
    return ReservaResponse.from_entity(reserva)
