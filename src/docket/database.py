from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import NullPool

from docket.config import settings
from docket.models import Base


def _connect_args(url: str) -> dict:
    if url.startswith("postgresql+asyncpg"):
        return {"server_settings": {"application_name": "docket-desk"}}
    return {}


# Create async engine (asyncpg in production, aiosqlite for local runs and tests)
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    future=True,
    poolclass=NullPool,
    connect_args=_connect_args(settings.DATABASE_URL),
)

# Create async session factory
async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

async def init_db():
    """Initialize database tables"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

__all__ = ["async_session", "engine", "init_db"]
