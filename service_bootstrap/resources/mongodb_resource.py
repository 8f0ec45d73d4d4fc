"""MongoDB connector for an optional document store

Not part of the default acquisition order; register it alongside the
default connectors when a service needs one.
"""

from pymongo import MongoClient

from dagster import Config
from pydantic import Field

from config import DEFAULT_CONNECT_TIMEOUT, DEFAULT_VERIFY_TIMEOUT, env_float, env_int, env_str
from service_bootstrap.lifecycle.connector import DOCUMENT_STORE


class MongoDBConfig(Config):
    """Connection settings for the MongoDB document store."""

    host: str = Field(
        default="localhost",
        description="MongoDB host address"
    )
    port: int = Field(
        default=27017,
        description="MongoDB port number"
    )
    username: str = Field(
        default="",
        description="MongoDB username, empty for no authentication"
    )
    password: str = Field(
        default="",
        description="MongoDB password"
    )
    auth_source: str = Field(
        default="admin",
        description="Authentication database"
    )
    connect_timeout: float = Field(
        default=DEFAULT_CONNECT_TIMEOUT,
        description="Seconds to wait for server selection and socket connect"
    )
    verify_timeout: float = Field(
        default=DEFAULT_VERIFY_TIMEOUT,
        description="Seconds to wait for the ping reply"
    )

    @classmethod
    def from_env(cls) -> "MongoDBConfig":
        """Build the config from MONGO_* environment variables."""
        return cls(
            host=env_str("MONGO_HOST", "localhost"),
            port=env_int("MONGO_PORT", 27017),
            username=env_str("MONGO_ROOT_USER", ""),
            password=env_str("MONGO_ROOT_PASSWORD", ""),
            auth_source=env_str("MONGO_AUTH_SOURCE", "admin"),
            connect_timeout=env_float("MONGO_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
            verify_timeout=env_float("MONGO_VERIFY_TIMEOUT", DEFAULT_VERIFY_TIMEOUT),
        )

    def __str__(self) -> str:
        return f"MongoDBConfig(host={self.host}, port={self.port}, username={self.username or None})"


class MongoDBConnector:
    """Connector yielding a ``MongoClient`` as the document store handle."""

    kind = DOCUMENT_STORE

    def connect(self, config: MongoDBConfig) -> MongoClient:
        """Build a MongoDB client.

        MongoClient connects in the background, so a bad address only
        shows up when ``verify`` pings the server.
        """
        credentials = {}
        if config.username:
            credentials = {
                "username": config.username,
                "password": config.password,
                "authSource": config.auth_source,
            }

        return MongoClient(
            host=config.host,
            port=config.port,
            serverSelectionTimeoutMS=int(config.connect_timeout * 1000),
            connectTimeoutMS=int(config.connect_timeout * 1000),
            socketTimeoutMS=int(config.verify_timeout * 1000),
            **credentials
        )

    def verify(self, handle: MongoClient, config: MongoDBConfig) -> None:
        handle.admin.command("ping")

    def close(self, handle: MongoClient) -> None:
        handle.close()
