"""Connection parameters derived from a URL-form connection string."""

import ssl
from dataclasses import dataclass, field
from typing import Any, Final
from urllib.parse import parse_qs, unquote, urlsplit

from sqlalchemy.engine import URL

from src.projects_api.core.exceptions import InvalidDatabaseUrlError

DEFAULT_HOST: Final[str] = "localhost"
DEFAULT_PORT: Final[int] = 5432
DEFAULT_DATABASE: Final[str] = "postgres"
DEFAULT_USERNAME: Final[str] = "postgres"
DEFAULT_PASSWORD: Final[str] = ""
# Hosted databases require TLS unless the URL says otherwise
DEFAULT_SSL_MODE: Final[str] = "require"

DRIVERNAME: Final[str] = "postgresql+asyncpg"

_UNENCRYPTED_MODES: Final[frozenset[str]] = frozenset({"disable", "allow"})


@dataclass(frozen=True, slots=True)
class ConnectionParameters:
    """Resolved host/port/database/credentials/TLS mode for reaching storage."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    database: str = DEFAULT_DATABASE
    username: str = DEFAULT_USERNAME
    password: str = field(default=DEFAULT_PASSWORD, repr=False)
    ssl_mode: str = DEFAULT_SSL_MODE

    def url(self) -> URL:
        """SQLAlchemy URL for the asyncpg driver.

        TLS is passed through ``connect_args()``, not the URL query.
        """
        return URL.create(
            DRIVERNAME,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    def connect_args(self) -> dict[str, Any]:
        """Driver connection arguments including SSL configuration."""
        connect_args: dict[str, Any] = {}

        if self.ssl_mode in _UNENCRYPTED_MODES:
            return connect_args

        ssl_context = ssl.create_default_context()
        if self.ssl_mode in ("verify-ca", "verify-full"):
            ssl_context.check_hostname = self.ssl_mode == "verify-full"
            ssl_context.verify_mode = ssl.CERT_REQUIRED
        else:
            # prefer, require and anything unrecognised: encrypt without verification
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = ssl_context

        return connect_args

    def describe(self) -> dict[str, Any]:
        """Loggable view of the parameters. Never includes the password."""
        return {
            "host": self.host,
            "port": self.port,
            "database": self.database,
            "user": self.username,
            "ssl_mode": self.ssl_mode,
        }


def resolve_connection_string(database_url: str) -> ConnectionParameters:
    """Parse ``scheme://[user[:pass]@]host[:port]/path[?query]``.

    Args:
        database_url: The connection string, e.g. the ``DATABASE_URL`` value.

    Returns:
        ConnectionParameters with defaults applied for absent components.

    Raises:
        InvalidDatabaseUrlError: If the string cannot be parsed as a URL.
    """
    try:
        parts = urlsplit(database_url)
        # Port parsing is lazy; out-of-range or non-numeric ports raise here
        port = parts.port
    except ValueError as e:
        raise InvalidDatabaseUrlError() from e

    # Percent-decoding only: "+" stays a literal plus, unlike form decoding (unquote_plus)
    database = unquote(parts.path.lstrip("/")) or DEFAULT_DATABASE

    username = unquote(parts.username) if parts.username is not None else DEFAULT_USERNAME
    password = unquote(parts.password) if parts.password is not None else DEFAULT_PASSWORD

    ssl_mode = DEFAULT_SSL_MODE
    if parts.query:
        query = parse_qs(parts.query, keep_blank_values=True)
        if "sslmode" in query:
            ssl_mode = query["sslmode"][-1]

    return ConnectionParameters(
        host=parts.hostname or DEFAULT_HOST,
        port=port if port is not None else DEFAULT_PORT,
        database=database,
        username=username,
        password=password,
        ssl_mode=ssl_mode,
    )
