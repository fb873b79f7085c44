from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookings.api.dependencies import get_use_cases
from bookings.api.schemas.notificaciones import ReminderRunResponse

router = APIRouter()


@router.post(
    "/workers/reminders/run",
    response_model=ReminderRunResponse,
    status_code=status.HTTP_200_OK,
)
async def run_reminders(
    use_cases: Annotated[dict, Depends(get_use_cases)],
) -> ReminderRunResponse:
    """
    Ejecuta un barrido de recordatorios bajo demanda.

    Cada ejecución vuelve a notificar todas las reservas de la ventana.
    """
    sent = await use_cases["send_reminders"].run()
    return ReminderRunResponse(sent=sent)
