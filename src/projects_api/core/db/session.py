"""Database session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from src.projects_api.core.db.connection import ConnectionParameters
from src.projects_api.core.logging import get_logger

logger = get_logger(__name__)


def create_engine_for(params: ConnectionParameters) -> AsyncEngine:
    """Create an unpooled engine: every connection is opened and closed on demand."""
    return create_async_engine(
        params.url(),
        poolclass=NullPool,
        connect_args=params.connect_args(),
    )


@asynccontextmanager
async def open_session(
    params: ConnectionParameters,
    engine: AsyncEngine | None = None,
) -> AsyncGenerator[AsyncSession]:
    """Open one connection and bind a session to it.

    Args:
        params: Connection parameters resolved for this request.
        engine: Optional engine override for testing. When given, it is not disposed.

    Yields:
        AsyncSession bound to the connection. Callers commit; anything uncommitted
        is rolled back when the session closes.
    """
    owns_engine = engine is None
    if engine is None:
        engine = create_engine_for(params)

    try:
        try:
            connection = await engine.connect()
        except Exception:
            logger.error("Database connection failed", **params.describe())
            raise

        try:
            session_factory = async_sessionmaker(
                bind=connection,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
            async with session_factory() as session:
                yield session
        finally:
            await connection.close()
    finally:
        if owns_engine:
            await engine.dispose()
