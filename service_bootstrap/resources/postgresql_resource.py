"""PostgreSQL connector for the relational datastore

Handles connecting to, pinging and closing the application database.
"""

import psycopg2

from dagster import Config
from pydantic import Field

from config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_VERIFY_TIMEOUT, env_float, env_int, env_str
from service_bootstrap.lifecycle.connector import DATABASE


class PostgreSQLConfig(Config):
    """Connection settings for the PostgreSQL application database."""

    host: str = Field(
        default="localhost",
        description="PostgreSQL host address"
    )
    port: int = Field(
        default=5432,
        description="PostgreSQL port number"
    )
    database: str = Field(
        default="app_db",
        description="PostgreSQL database name"
    )
    user: str = Field(
        default="postgres",
        description="PostgreSQL username"
    )
    password: str = Field(
        default="",
        description="PostgreSQL password"
    )
    connect_timeout: float = Field(
        default=DEFAULT_CONNECT_TIMEOUT,
        description="Seconds to wait for the connection to be established"
    )
    verify_timeout: float = Field(
        default=DEFAULT_VERIFY_TIMEOUT,
        description="Seconds allowed for the liveness query"
    )

    @classmethod
    def from_env(cls) -> "PostgreSQLConfig":
        """Build the config from POSTGRES_* environment variables."""
        return cls(
            host=env_str("POSTGRES_HOST", "localhost"),
            port=env_int("POSTGRES_PORT", 5432),
            database=env_str("POSTGRES_DB", "app_db"),
            user=env_str("POSTGRES_USER", "postgres"),
            password=env_str("POSTGRES_PASSWORD", ""),
            connect_timeout=env_float("POSTGRES_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
            verify_timeout=env_float("POSTGRES_VERIFY_TIMEOUT", DEFAULT_VERIFY_TIMEOUT),
        )

    def __str__(self) -> str:
        return f"PostgreSQLConfig(host={self.host}, port={self.port}, database={self.database}, user={self.user})"


class PostgreSQLConnector:
    """Connector yielding a raw psycopg2 connection as the database handle."""

    kind = DATABASE

    def connect(self, config: PostgreSQLConfig):
        """Open a psycopg2 connection.

        The statement timeout is set for the whole session so the liveness
        query cannot hang past ``verify_timeout``.
        """
        # libpq only accepts whole seconds, and 0 means wait forever
        connect_timeout = max(1, int(round(config.connect_timeout)))
        statement_timeout_ms = max(1, int(config.verify_timeout * 1000))

        return psycopg2.connect(
            host=config.host,
            port=config.port,
            database=config.database,
            user=config.user,
            password=config.password,
            connect_timeout=connect_timeout,
            options=f"-c statement_timeout={statement_timeout_ms}"
        )

    def verify(self, handle, config: PostgreSQLConfig) -> None:
        with handle.cursor() as cur:
            cur.execute("SELECT 1")
            cur.fetchone()
        # Leave the session outside any transaction
        handle.rollback()

    def close(self, handle) -> None:
        handle.close()
