"""Database utilities - connection parameters and sessions."""

from src.projects_api.core.db.connection import (
    ConnectionParameters,
    resolve_connection_string,
)
from src.projects_api.core.db.session import create_engine_for, open_session

__all__ = [
    # Connection string
    "ConnectionParameters",
    "resolve_connection_string",
    # Session
    "create_engine_for",
    "open_session",
]
