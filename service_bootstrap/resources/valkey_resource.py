"""Valkey connector for the cache

The Valkey client connects lazily from its pool, so ``connect`` only builds
the client and the first network round-trip happens in ``verify``.
"""

from typing import Optional

import valkey
from valkey.exceptions import ConnectionError as ValkeyConnectionError

from dagster import Config
from pydantic import Field

from config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_VERIFY_TIMEOUT, env_float, env_int, env_str
from service_bootstrap.lifecycle.connector import CACHE


class ValkeyConfig(Config):
    """Connection settings for the Valkey cache."""

    host: str = Field(
        default="localhost",
        description="Valkey host address"
    )
    port: int = Field(
        default=6379,
        description="Valkey port number"
    )
    password: Optional[str] = Field(
        default=None,
        description="Valkey password, if authentication is enabled"
    )
    db: int = Field(
        default=0,
        description="Valkey logical database index"
    )
    max_connections: int = Field(
        default=10,
        description="Upper bound of pooled connections"
    )
    connect_timeout: float = Field(
        default=DEFAULT_CONNECT_TIMEOUT,
        description="Seconds to wait for a socket connection"
    )
    verify_timeout: float = Field(
        default=DEFAULT_VERIFY_TIMEOUT,
        description="Seconds to wait for a reply from the server"
    )

    @classmethod
    def from_env(cls) -> "ValkeyConfig":
        """Build the config from VALKEY_* environment variables."""
        return cls(
            host=env_str("VALKEY_HOST", "localhost"),
            port=env_int("VALKEY_PORT", 6379),
            password=env_str("VALKEY_PASSWORD", "") or None,
            db=env_int("VALKEY_DATABASE", 0),
            max_connections=env_int("VALKEY_MAX_CONNECTIONS", 10),
            connect_timeout=env_float("VALKEY_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
            verify_timeout=env_float("VALKEY_VERIFY_TIMEOUT", DEFAULT_VERIFY_TIMEOUT),
        )

    def __str__(self) -> str:
        password_display = "***" if self.password else "None"
        return (
            f"ValkeyConfig(host={self.host}, port={self.port}, "
            f"db={self.db}, password={password_display})"
        )


class ValkeyConnector:
    """Connector yielding a ``valkey.Valkey`` client as the cache handle."""

    kind = CACHE

    def connect(self, config: ValkeyConfig) -> valkey.Valkey:
        return valkey.Valkey(
            host=config.host,
            port=config.port,
            password=config.password,
            db=config.db,
            max_connections=config.max_connections,
            socket_connect_timeout=config.connect_timeout,
            socket_timeout=config.verify_timeout,
        )

    def verify(self, handle: valkey.Valkey, config: ValkeyConfig) -> None:
        if not handle.ping():
            raise ValkeyConnectionError("PING returned a falsy reply")

    def close(self, handle: valkey.Valkey) -> None:
        handle.close()
