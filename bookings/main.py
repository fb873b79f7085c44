import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from datetime import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookings.api.dependencies import run_reminder_scan
from bookings.api.deps import engine
from bookings.api.routers.health import router as health_router
from bookings.api.routers.notificaciones import router as notificaciones_router
from bookings.api.routers.reservas import router as reservas_router
from bookings.api.routers.worker import router as worker_router
from bookings.application.interfaces.clock import SystemClock
from bookings.config import get_settings
from bookings.domain.errors import DomainError, ErrorKind
from bookings.infrastructure.db.tables import metadata
from bookings.infrastructure.scheduling.reminder_scheduler import ReminderScheduler

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.DELIVERY_FAILURE: 502,
    ErrorKind.UNAUTHORIZED: 401,
}

REASON_PHRASES = {
    400: "Bad Request",
    401: "Unauthorized",
    404: "Not Found",
    502: "Bad Gateway",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    # Initialize DB tables (for dev/demo purposes)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    scheduler = None
    scheduler_task = None
    if settings.reminders_enabled:
        scheduler = ReminderScheduler(
            run_scan=run_reminder_scan,
            clock=SystemClock(settings.timezone),
            run_at=time(settings.reminder_hour, settings.reminder_minute),
        )
        scheduler_task = asyncio.create_task(scheduler.start())

    yield

    # Cleanup
    if scheduler is not None:
        await scheduler.stop()
        scheduler_task.cancel()
        try:
            await scheduler_task
        except asyncio.CancelledError:
            pass
    await engine.dispose()


app = FastAPI(
    title="SomPoble Bookings API",
    version="0.1.0",
    lifespan=lifespan,
)


def _error_body(status_code: int, code: str, message: str) -> dict:
    return {
        "status": status_code,
        "error": REASON_PHRASES.get(status_code, "Error"),
        "code": code,
        "message": message,
    }


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    status_code = STATUS_BY_KIND[exc.kind]
    logger.info(
        "Domain error",
        extra={"path": request.url.path, "code": exc.code, "status": status_code},
    )
    return JSONResponse(status_code=status_code, content=_error_body(status_code, exc.code, exc.message))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content=_error_body(400, "VALIDATION_ERROR", f"Solicitud inválida: {details}"),
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists.",
        },
    )


app.include_router(health_router, tags=["Health"])
app.include_router(reservas_router, prefix="/api/v1", tags=["Reservas"])
app.include_router(notificaciones_router, prefix="/api/v1", tags=["Notificaciones"])
app.include_router(worker_router, prefix="/api/v1", tags=["Worker"])
