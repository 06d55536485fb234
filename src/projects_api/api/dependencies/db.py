"""Database dependencies - one connection per request."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.projects_api.core.config import get_database_url
from src.projects_api.core.db import (
    ConnectionParameters,
    open_session,
    resolve_connection_string,
)
from src.projects_api.core.exceptions import DatabaseNotConfiguredError


def get_connection_parameters() -> ConnectionParameters:
    """Resolve connection parameters from DATABASE_URL for this request.

    Raises:
        DatabaseNotConfiguredError: DATABASE_URL is not set. Raised before any
            connection attempt.
        InvalidDatabaseUrlError: DATABASE_URL cannot be parsed.
    """
    database_url = get_database_url()
    if database_url is None:
        raise DatabaseNotConfiguredError()
    return resolve_connection_string(database_url)


Connection = Annotated[ConnectionParameters, Depends(get_connection_parameters)]


async def get_db_session(params: Connection) -> AsyncGenerator[AsyncSession]:
    """Session on a fresh connection, closed with the request."""
    async with open_session(params) as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
