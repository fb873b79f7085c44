from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookings.api.deps import AsyncSessionLocal
from bookings.application.interfaces.capacity_lock import CapacityLock
from bookings.application.interfaces.clock import Clock, SystemClock
from bookings.application.interfaces.directories import (
    ClientDirectory,
    CompanyDirectory,
    ServiceDirectory,
)
from bookings.application.interfaces.email_gateway import EmailGateway
from bookings.application.interfaces.notificacion_repo import NotificacionRepo
from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.application.interfaces.transaction_manager import TransactionManager
from bookings.application.use_cases.cancel_reserva import (
    CancelReservasByClienteUseCase,
    CancelReservasByEmpresaUseCase,
    CancelReservaUseCase,
)
from bookings.application.use_cases.create_reserva import CreateReservaUseCase
from bookings.application.use_cases.evaluate_admission import AdmissionRule
from bookings.application.use_cases.get_reservas import (
    GetReservaUseCase,
    ListReservasByClienteUseCase,
    ListReservasByEmpresaUseCase,
)
from bookings.application.use_cases.manage_notificaciones import (
    DeleteNotificacionUseCase,
    GetNotificacionUseCase,
    ListNotificacionesUseCase,
)
from bookings.application.use_cases.notify import NotificationDispatcher
from bookings.application.use_cases.send_reminders import ReminderScanner
from bookings.application.use_cases.update_reserva import UpdateReservaUseCase
from bookings.config import Settings, get_settings
from bookings.infrastructure.db.repositories.capacity_lock_sql import SQLCapacityLock
from bookings.infrastructure.db.repositories.directories_sql import (
    ClientDirectorySQL,
    CompanyDirectorySQL,
    ServiceDirectorySQL,
)
from bookings.infrastructure.db.repositories.notificacion_repo_sql import NotificacionRepoSQL
from bookings.infrastructure.db.repositories.reserva_repo_sql import ReservaRepoSQL
from bookings.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from bookings.infrastructure.email.smtp_gateway import SMTPEmailGateway
from bookings.infrastructure.in_memory.capacity_lock import InMemoryCapacityLock
from bookings.infrastructure.in_memory.directories import (
    InMemoryClientDirectory,
    InMemoryCompanyDirectory,
    InMemoryServiceDirectory,
)
from bookings.infrastructure.in_memory.email_gateway import RecordingEmailGateway
from bookings.infrastructure.in_memory.notificacion_repo import InMemoryNotificacionRepo
from bookings.infrastructure.in_memory.reserva_repo import InMemoryReservaRepo
from bookings.infrastructure.in_memory.transaction_manager import NoopTransactionManager


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


def _build_email_gateway(settings: Settings) -> EmailGateway:
    if settings.smtp_host:
        return SMTPEmailGateway.from_settings(settings)
    return RecordingEmailGateway()


@lru_cache(maxsize=1)
def _in_memory_bundle():
    settings = get_settings()
    return {
        "reserva_repo": InMemoryReservaRepo(),
        "notificacion_repo": InMemoryNotificacionRepo(),
        "client_directory": InMemoryClientDirectory(),
        "company_directory": InMemoryCompanyDirectory(),
        "service_directory": InMemoryServiceDirectory(),
        "capacity_lock": InMemoryCapacityLock(),
        "tx_manager": NoopTransactionManager(),
        "email_gateway": _build_email_gateway(settings),
        "clock": SystemClock(settings.timezone),
    }


def build_use_cases(
    *,
    reserva_repo: ReservaRepo,
    notificacion_repo: NotificacionRepo,
    client_directory: ClientDirectory,
    company_directory: CompanyDirectory,
    service_directory: ServiceDirectory,
    capacity_lock: CapacityLock,
    tx_manager: TransactionManager,
    email_gateway: EmailGateway,
    clock: Clock,
    reminder_window_days: int = 1,
) -> dict:
    dispatcher = NotificationDispatcher(
        notificacion_repo=notificacion_repo,
        client_directory=client_directory,
        company_directory=company_directory,
        email_gateway=email_gateway,
        transaction_manager=tx_manager,
        clock=clock,
    )
    admission_rule = AdmissionRule(service_directory=service_directory, reserva_repo=reserva_repo)
    ledger_deps = {
        "reserva_repo": reserva_repo,
        "client_directory": client_directory,
        "company_directory": company_directory,
        "service_directory": service_directory,
        "admission_rule": admission_rule,
        "capacity_lock": capacity_lock,
        "transaction_manager": tx_manager,
        "dispatcher": dispatcher,
    }
    return {
        "dispatcher": dispatcher,
        "admission_rule": admission_rule,
        "create_reserva": CreateReservaUseCase(**ledger_deps),
        "update_reserva": UpdateReservaUseCase(**ledger_deps),
        "cancel_reserva": CancelReservaUseCase(
            reserva_repo=reserva_repo,
            transaction_manager=tx_manager,
            dispatcher=dispatcher,
        ),
        "cancel_by_cliente": CancelReservasByClienteUseCase(
            reserva_repo=reserva_repo,
            client_directory=client_directory,
            transaction_manager=tx_manager,
            dispatcher=dispatcher,
        ),
        "cancel_by_empresa": CancelReservasByEmpresaUseCase(
            reserva_repo=reserva_repo,
            company_directory=company_directory,
            transaction_manager=tx_manager,
        ),
        "get_reserva": GetReservaUseCase(reserva_repo=reserva_repo, transaction_manager=tx_manager),
        "list_by_cliente": ListReservasByClienteUseCase(
            reserva_repo=reserva_repo,
            client_directory=client_directory,
            transaction_manager=tx_manager,
        ),
        "list_by_empresa": ListReservasByEmpresaUseCase(
            reserva_repo=reserva_repo,
            company_directory=company_directory,
            transaction_manager=tx_manager,
        ),
        "list_notificaciones": ListNotificacionesUseCase(
            notificacion_repo=notificacion_repo, transaction_manager=tx_manager
        ),
        "get_notificacion": GetNotificacionUseCase(
            notificacion_repo=notificacion_repo, transaction_manager=tx_manager
        ),
        "delete_notificacion": DeleteNotificacionUseCase(
            notificacion_repo=notificacion_repo, transaction_manager=tx_manager
        ),
        "send_reminders": ReminderScanner(
            reserva_repo=reserva_repo,
            dispatcher=dispatcher,
            clock=clock,
            transaction_manager=tx_manager,
            window_days=reminder_window_days,
        ),
    }


def build_sql_use_cases(session: AsyncSession, settings: Settings) -> dict:
    return build_use_cases(
        reserva_repo=ReservaRepoSQL(session),
        notificacion_repo=NotificacionRepoSQL(session),
        client_directory=ClientDirectorySQL(session),
        company_directory=CompanyDirectorySQL(session),
        service_directory=ServiceDirectorySQL(session),
        capacity_lock=SQLCapacityLock(session),
        tx_manager=SQLAlchemyTransactionManager(session),
        email_gateway=_build_email_gateway(settings),
        clock=SystemClock(settings.timezone),
        reminder_window_days=settings.reminder_window_days,
    )


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    if settings.use_in_memory:
        return build_use_cases(
            **_in_memory_bundle(),
            reminder_window_days=settings.reminder_window_days,
        )

    if not session:
        raise RuntimeError("DB session not available")
    return build_sql_use_cases(session, settings)


async def run_reminder_scan() -> int:
    """Barrido de recordatorios fuera de una petición HTTP (planificador diario)."""
    settings = get_settings()
    if settings.use_in_memory:
        use_cases = build_use_cases(
            **_in_memory_bundle(),
            reminder_window_days=settings.reminder_window_days,
        )
        return await use_cases["send_reminders"].run()

    async with AsyncSessionLocal() as session:
        return await build_sql_use_cases(session, settings)["send_reminders"].run()
