"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Libro de reservas in-memory con catálogo de prueba
- Base de datos SQLite en fichero (para concurrencia real entre conexiones)
- Cliente HTTP de prueba (httpx + ASGITransport)
"""

from datetime import time
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bookings.api.dependencies import _in_memory_bundle
from bookings.application.interfaces.clock import FakeClock
from bookings.infrastructure.db.engine import build_engine, build_sessionmaker
from bookings.infrastructure.db.tables import (
    clientes,
    empresarios,
    empresas,
    horarios,
    metadata,
    servicios,
)
from bookings.infrastructure.in_memory import RecordingEmailGateway
from bookings.main import app
from tests.factories import (
    AJENO,
    CIF,
    DNI_ANA,
    DNI_EMPRESARIO,
    DNI_LUIS,
    MASAJE,
    NOW,
    OTHER_CIF,
    PELUQUERIA,
    SIN_HORARIO,
    Ledger,
    make_ledger,
    seed_catalog,
)


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: tests that hit a real (SQLite) database")
    config.addinivalue_line("markers", "concurrency: tests that race concurrent admissions")


# ============================================================================
# LIBRO DE RESERVAS IN-MEMORY
# ============================================================================


@pytest.fixture
def ledger() -> Ledger:
    return make_ledger()


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================


async def seed_database(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.execute(
            insert(clientes),
            [
                {"dni": DNI_ANA, "nombre": "Ana", "apellidos": "García", "email": "ana@example.com"},
                {"dni": DNI_LUIS, "nombre": "Luis", "apellidos": "Pérez", "email": "luis@example.com"},
            ],
        )
        await conn.execute(
            insert(empresarios).values(
                dni=DNI_EMPRESARIO, nombre="Marta", apellidos="Soler", email="marta@poble.example.com"
            )
        )
        await conn.execute(
            insert(empresas),
            [
                {
                    "identificador_fiscal": CIF,
                    "nombre": "Peluquería Poble",
                    "email": "info@poble.example.com",
                    "dni_empresario": DNI_EMPRESARIO,
                },
                {
                    "identificador_fiscal": OTHER_CIF,
                    "nombre": "Otra",
                    "email": "otra@example.com",
                    "dni_empresario": None,
                },
            ],
        )
        await conn.execute(
            insert(servicios),
            [
                {"id_servicio": PELUQUERIA, "nombre": "Corte de pelo", "limite_reservas": 1, "identificador_fiscal_empresa": CIF},
                {"id_servicio": MASAJE, "nombre": "Masaje", "limite_reservas": 3, "identificador_fiscal_empresa": CIF},
                {"id_servicio": SIN_HORARIO, "nombre": "Consulta", "limite_reservas": 5, "identificador_fiscal_empresa": CIF},
                {"id_servicio": AJENO, "nombre": "Servicio ajeno", "limite_reservas": 5, "identificador_fiscal_empresa": OTHER_CIF},
            ],
        )
        await conn.execute(
            insert(horarios),
            [
                {
                    "id_servicio": PELUQUERIA,
                    "identificador_fiscal_empresa": CIF,
                    "dias_laborables": "Monday,Tuesday,Wednesday,Thursday,Friday",
                    "horario_inicio": time(9, 0),
                    "horario_fin": time(18, 0),
                },
                {
                    "id_servicio": MASAJE,
                    "identificador_fiscal_empresa": CIF,
                    "dias_laborables": "Monday",
                    "horario_inicio": time(9, 0),
                    "horario_fin": time(18, 0),
                },
            ],
        )


@pytest_asyncio.fixture
async def sql_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """
    SQLite en fichero: cada sesión abre su propia conexión, así que los
    bloqueos entre transacciones concurrentes son reales.
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'bookings.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    await seed_database(engine)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(sql_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_sessionmaker(sql_engine)


@pytest_asyncio.fixture
async def db_session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================


@pytest.fixture
def memory_bundle():
    """Bundle in-memory de la aplicación, limpio y con el catálogo de prueba."""
    _in_memory_bundle.cache_clear()
    bundle = _in_memory_bundle()
    bundle["clock"] = FakeClock(NOW)
    bundle["email_gateway"] = RecordingEmailGateway()
    seed_catalog(bundle["client_directory"], bundle["company_directory"], bundle["service_directory"])
    yield bundle
    _in_memory_bundle.cache_clear()


@pytest_asyncio.fixture
async def api_client(memory_bundle) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
