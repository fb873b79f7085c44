"""Datos de prueba compartidos: catálogo mínimo y libro de reservas in-memory."""

from dataclasses import dataclass
from datetime import date, datetime, time

from bookings.api.dependencies import build_use_cases
from bookings.application.interfaces.capacity_lock import CapacityLock
from bookings.application.interfaces.clock import FakeClock
from bookings.application.interfaces.reserva_repo import ReservaRepo
from bookings.domain.entities import (
    ClienteRecord,
    EmpresaRecord,
    EmpresarioRecord,
    Horario,
    Servicio,
)
from bookings.infrastructure.in_memory import (
    InMemoryCapacityLock,
    InMemoryClientDirectory,
    InMemoryCompanyDirectory,
    InMemoryNotificacionRepo,
    InMemoryReservaRepo,
    InMemoryServiceDirectory,
    NoopTransactionManager,
    RecordingEmailGateway,
)

MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)
WEDNESDAY = date(2026, 10, 21)
SATURDAY = date(2026, 10, 24)
NOW = datetime(2026, 10, 19, 7, 30)

DNI_ANA = "12345678A"
DNI_LUIS = "87654321B"
DNI_EMPRESARIO = "11111111H"
CIF = "B12345678"
OTHER_CIF = "B87654321"

# id_servicio
PELUQUERIA = 1  # límite 1, lunes a viernes 09:00-18:00
MASAJE = 2  # límite 3, sólo lunes 09:00-18:00
SIN_HORARIO = 3  # límite 5, sin horarios
AJENO = 4  # pertenece a OTHER_CIF

WEEKDAYS_ES = "lunes,martes,miercoles,jueves,viernes"


def seed_catalog(
    clients: InMemoryClientDirectory,
    companies: InMemoryCompanyDirectory,
    services: InMemoryServiceDirectory,
) -> None:
    clients.add(ClienteRecord(dni=DNI_ANA, nombre="Ana", apellidos="García", email="ana@example.com"))
    clients.add(ClienteRecord(dni=DNI_LUIS, nombre="Luis", apellidos="Pérez", email="luis@example.com"))
    companies.add(
        EmpresaRecord(
            identificador_fiscal=CIF,
            nombre="Peluquería Poble",
            email="info@poble.example.com",
            empresario=EmpresarioRecord(
                dni=DNI_EMPRESARIO, nombre="Marta", apellidos="Soler", email="marta@poble.example.com"
            ),
        )
    )
    companies.add(
        EmpresaRecord(identificador_fiscal=OTHER_CIF, nombre="Otra", email="otra@example.com")
    )
    services.add(
        Servicio(
            id_servicio=PELUQUERIA,
            nombre="Corte de pelo",
            limite_reservas=1,
            identificador_fiscal_empresa=CIF,
            horarios=[Horario(dias=WEEKDAYS_ES, inicio=time(9, 0), fin=time(18, 0))],
        )
    )
    services.add(
        Servicio(
            id_servicio=MASAJE,
            nombre="Masaje",
            limite_reservas=3,
            identificador_fiscal_empresa=CIF,
            horarios=[Horario(dias={"Monday"}, inicio=time(9, 0), fin=time(18, 0))],
        )
    )
    services.add(
        Servicio(
            id_servicio=SIN_HORARIO,
            nombre="Consulta",
            limite_reservas=5,
            identificador_fiscal_empresa=CIF,
        )
    )
    services.add(
        Servicio(
            id_servicio=AJENO,
            nombre="Servicio ajeno",
            limite_reservas=5,
            identificador_fiscal_empresa=OTHER_CIF,
            horarios=[Horario(dias=WEEKDAYS_ES, inicio=time(0, 0), fin=time(23, 59))],
        )
    )


@dataclass
class Ledger:
    reservas: ReservaRepo
    notificaciones: InMemoryNotificacionRepo
    clients: InMemoryClientDirectory
    companies: InMemoryCompanyDirectory
    services: InMemoryServiceDirectory
    email: RecordingEmailGateway
    clock: FakeClock
    use_cases: dict

    def __getitem__(self, name: str):
        return self.use_cases[name]


def make_ledger(
    reserva_repo: ReservaRepo | None = None,
    capacity_lock: CapacityLock | None = None,
    email_gateway: RecordingEmailGateway | None = None,
) -> Ledger:
    reservas = reserva_repo or InMemoryReservaRepo()
    notificaciones = InMemoryNotificacionRepo()
    clients = InMemoryClientDirectory()
    companies = InMemoryCompanyDirectory()
    services = InMemoryServiceDirectory()
    seed_catalog(clients, companies, services)
    email = email_gateway or RecordingEmailGateway()
    clock = FakeClock(NOW)
    use_cases = build_use_cases(
        reserva_repo=reservas,
        notificacion_repo=notificaciones,
        client_directory=clients,
        company_directory=companies,
        service_directory=services,
        capacity_lock=capacity_lock or InMemoryCapacityLock(),
        tx_manager=NoopTransactionManager(),
        email_gateway=email,
        clock=clock,
    )
    return Ledger(
        reservas=reservas,
        notificaciones=notificaciones,
        clients=clients,
        companies=companies,
        services=services,
        email=email,
        clock=clock,
        use_cases=use_cases,
    )
