from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from bookings.config import get_settings
from bookings.infrastructure.db.engine import build_engine, build_sessionmaker

settings = get_settings()

# Ensure we have a valid URL or fallback to memory for dev/test if not set
DB_URL = settings.database_url or "sqlite+aiosqlite:///:memory:"

engine = build_engine(DB_URL, echo=settings.sql_echo)
AsyncSessionLocal = build_sessionmaker(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
