import asyncio
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from rethinking_econ.core.config import settings
from rethinking_econ.db import base  # noqa: F401  # ensure models are imported for metadata

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]

engine = create_async_engine(settings.DATABASE_URL, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    class_=AsyncSession,
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def _get_alembic_config() -> Config:
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))
    config.attributes["url_configured"] = True
    config.attributes["configure_logger"] = False
    return config


async def run_migrations() -> None:
    """Upgrade the database to the latest Alembic revision.

    ``env.py`` drives the async engine with ``asyncio.run``, so the upgrade
    runs in a worker thread with its own event loop.
    """
    logger.info("Running database migrations")
    await asyncio.to_thread(command.upgrade, _get_alembic_config(), "head")
    logger.info("Database migrations complete")
