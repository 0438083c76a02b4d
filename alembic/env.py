"""Alembic environment for the rethinking_econ schema."""

from __future__ import annotations

import asyncio
import re
from datetime import datetime, timezone
from logging.config import fileConfig
from pathlib import Path
import sys

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config
from sqlmodel import SQLModel

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rethinking_econ.core.config import settings  # noqa: E402
from rethinking_econ.db import base  # noqa: F401,E402  # register every table on the metadata

config = context.config

if config.config_file_name is not None and config.attributes.get("configure_logger", True):
    fileConfig(config.config_file_name)

# The CLI reads the URL from settings; run_migrations() has already set it.
if not config.attributes.get("url_configured"):
    config.set_main_option("sqlalchemy.url", settings.DATABASE_URL.replace("%", "%%"))

target_metadata = SQLModel.metadata

REVISION_FILE = re.compile(r"^\d{8}_(\d{4})_")


def _process_revision_directives(context, revision, directives):
    """Name new revisions ``YYYYMMDD_NNNN`` with a project-wide sequence."""
    if not directives:
        return
    versions_dir = Path(__file__).parent / "versions"
    sequence = 0
    for path in versions_dir.glob("*.py"):
        match = REVISION_FILE.match(path.stem)
        if match:
            sequence = max(sequence, int(match.group(1)))
    today = datetime.now(timezone.utc).strftime("%Y%m%d")
    directives[0].rev_id = f"{today}_{sequence + 1:04d}"


def run_migrations_offline() -> None:
    """Emit SQL to stdout without a database connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
        render_as_batch=True,
        process_revision_directives=_process_revision_directives,
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=True,
        # Enum types created by one revision must be committed before a later one uses them
        transaction_per_migration=True,
        process_revision_directives=_process_revision_directives,
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section) or {},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
