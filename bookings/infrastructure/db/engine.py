from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


def engine_options(database_url: str, echo: bool = False) -> dict:
    """
    Opciones de ``create_async_engine`` según el backend.

    MySQL/MariaDB usan REPEATABLE READ por defecto: el conteo de capacidad
    leería la instantánea previa al bloqueo de ``reserva_capacidad`` y no
    vería las reservas confirmadas por la transacción anterior.
    """
    backend = make_url(database_url).get_backend_name()
    options = {"echo": echo, "pool_pre_ping": True}
    if backend != "sqlite":
        options["pool_recycle"] = 3600
    if backend in ("mysql", "mariadb"):
        options["isolation_level"] = "READ COMMITTED"
    return options


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    return create_async_engine(database_url, **engine_options(database_url, echo))


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
