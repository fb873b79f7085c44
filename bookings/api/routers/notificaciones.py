from fastapi import APIRouter, Depends, status

from bookings.api.dependencies import get_use_cases
from bookings.api.schemas.notificaciones import NotificacionResponse
from bookings.api.schemas.reservas import MessageResponse

router = APIRouter()


@router.get(
    "/notificaciones/clientes/{dni_cliente}",
    response_model=list[NotificacionResponse],
    status_code=status.HTTP_200_OK,
)
async def list_notificaciones_by_cliente(
    dni_cliente: str,
    use_cases=Depends(get_use_cases),
) -> list[NotificacionResponse]:
    notificaciones = await use_cases["list_notificaciones"].by_cliente(dni_cliente)
    return [NotificacionResponse.from_entity(n) for n in notificaciones]


@router.get(
    "/notificaciones/empresarios/{dni_empresario}",
    response_model=list[NotificacionResponse],
    status_code=status.HTTP_200_OK,
)
async def list_notificaciones_by_empresario(
    dni_empresario: str,
    use_cases=Depends(get_use_cases),
) -> list[NotificacionResponse]:
    notificaciones = await use_cases["list_notificaciones"].by_empresario(dni_empresario)
    return [NotificacionResponse.from_entity(n) for n in notificaciones]


@router.get(
    "/notificaciones/{id_notificacion}",
    response_model=NotificacionResponse,
    status_code=status.HTTP_200_OK,
)
async def get_notificacion(
    id_notificacion: int,
    use_cases=Depends(get_use_cases),
) -> NotificacionResponse:
    notificacion = await use_cases["get_notificacion"].execute(id_notificacion)
    return NotificacionResponse.from_entity(notificacion)


@router.delete(
    "/notificaciones/{id_notificacion}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_notificacion(
    id_notificacion: int,
    use_cases=Depends(get_use_cases),
) -> MessageResponse:
    await use_cases["delete_notificacion"].execute(id_notificacion)
    return MessageResponse(message="Notificación eliminada correctamente.")
