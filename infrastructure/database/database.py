import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

logger = logging.getLogger(__name__)

# Base for models
Base = declarative_base()

_engine: AsyncEngine | None = None
_session_factory: sessionmaker | None = None


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        if settings.DATABASE_URL is None:
            raise ValueError(
                "DATABASE_URL is not configured. Set DATABASE_URL explicitly or provide "
                "PGHOST/PGPORT/PGDATABASE/PGUSER/PGPASSWORD environment variables."
            )
        _engine = create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
        logger.info("Created database engine for %s", _engine.url.render_as_string(hide_password=True))
    return _engine


def SessionLocal() -> AsyncSession:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
            class_=AsyncSession,
        )
    return _session_factory()


async def get_db():
    db = SessionLocal()
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    finally:
        await db.close()


async def create_tables():
    # Ensure all model modules register with Base metadata
    from infrastructure.database import models as _models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables():
    from infrastructure.database import models as _models  # noqa: F401

    async with get_engine().begin() as conn:
        for table in Base.metadata.sorted_tables:
            await conn.execute(text(f"DROP TABLE IF EXISTS {table.name} CASCADE"))


async def dispose_engine():
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
