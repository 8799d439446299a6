"""
Test Configuration

Environment is set before any application module is imported, because
`settings` is built at import time.

Architecture:
- Unit tests (test/**/unit/, test/platform/): every collaborator replaced by doubles
- HTTP-level tests build the app with create_app() and override dependencies
- Integration tests (@pytest.mark.integration): real PostgreSQL. The test database
  is created and migrated once per session, and every table is truncated before each test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# =============================================================================
import os


def _early_setup_test_environment() -> None:
    os.environ['POSTGRES_DB'] = 'tm_order_test_db'
    os.environ['DEBUG'] = 'false'
    os.environ['SECRET_KEY'] = 'tm-order-unit-test-secret-key-0123456789'
    os.environ['ALGORITHM'] = 'HS256'
    os.environ['APPLICATION_TIMEZONE'] = 'Asia/Jakarta'
    os.environ['APPLICATION_BASE_URL'] = 'http://testserver/tm-order'
    os.environ.setdefault('OTEL_CONSOLE_EXPORT', 'false')


_early_setup_test_environment()

# =============================================================================
# Now safe to import other modules
# =============================================================================
import asyncio  # noqa: E402
from pathlib import Path  # noqa: E402
from typing import AsyncGenerator  # noqa: E402

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.config.core_setting import settings  # noqa: E402


# =============================================================================
# Pytest Hooks
# =============================================================================
def _is_integration(item: pytest.Item) -> bool:
    return item.get_closest_marker('integration') is not None


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if _is_integration(item):
            item.fixturenames.append('clean_database')


def pytest_collection_finish(session: pytest.Session) -> None:
    # Unit-only runs never touch PostgreSQL
    if any(_is_integration(item) for item in session.items):
        asyncio.run(_setup_test_database())


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
_cached_tables: list[str] | None = None


async def _setup_test_database() -> None:
    db_url = settings.DATABASE_URL_ASYNC

    # Create database if not exists
    postgres_url = db_url.replace(f'/{settings.POSTGRES_DB}', '/postgres')
    engine = create_async_engine(postgres_url, isolation_level='AUTOCOMMIT')
    async with engine.begin() as conn:
        result = await conn.execute(
            text(f"SELECT 1 FROM pg_database WHERE datname = '{settings.POSTGRES_DB}'")
        )
        if not result.fetchone():
            await conn.execute(text(f'CREATE DATABASE {settings.POSTGRES_DB}'))
    await engine.dispose()

    # Reset schema and run migrations
    reset_engine = create_async_engine(db_url)
    async with reset_engine.begin() as conn:
        await conn.execute(text('DROP SCHEMA public CASCADE'))
        await conn.execute(text('CREATE SCHEMA public'))
    await reset_engine.dispose()

    root = Path(__file__).parent.parent
    alembic_cfg = Config(root / 'alembic.ini')
    alembic_cfg.set_main_option('script_location', str(root / 'src' / 'platform' / 'alembic'))
    alembic_cfg.set_main_option('sqlalchemy.url', settings.DATABASE_URL_SYNC)
    command.upgrade(alembic_cfg, 'head')


async def _clean_all_tables() -> None:
    global _cached_tables
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            if _cached_tables is None:
                result = await conn.execute(
                    text(
                        "SELECT tablename FROM pg_tables WHERE schemaname = 'public' "
                        "AND tablename != 'alembic_version'"
                    )
                )
                _cached_tables = [row[0] for row in result]

            if _cached_tables:
                quoted = [f'"{t}"' for t in _cached_tables]
                await conn.execute(text(f'TRUNCATE {", ".join(quoted)} RESTART IDENTITY CASCADE'))
    finally:
        await engine.dispose()


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield

    # The application engine is bound to this test's event loop
    from src.platform.database.orm_db_setting import dispose_engine

    await dispose_engine()
