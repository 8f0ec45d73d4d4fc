"""Dagster resource owning the service's external connections

Bootstraps the database, cache and broker when a run starts and releases
them when it ends.
"""

from typing import Any, Dict, Optional

from dagster import ConfigurableResource, InitResourceContext
from pydantic import Field, PrivateAttr

from service_bootstrap.startup import bootstrap
from service_bootstrap.lifecycle import BROKER, CACHE, DATABASE, ResourceBundle, ResourceRelease
from service_bootstrap.resources.broker_resource import BrokerConfig
from service_bootstrap.resources.postgresql_resource import PostgreSQLConfig
from service_bootstrap.resources.valkey_resource import ValkeyConfig


class ServiceResources(ConfigurableResource):
    """Resource exposing the bootstrapped bundle to ops and assets."""

    database: PostgreSQLConfig = Field(
        description="PostgreSQL connection settings"
    )
    cache: ValkeyConfig = Field(
        description="Valkey connection settings"
    )
    broker: BrokerConfig = Field(
        description="RabbitMQ connection settings"
    )

    _bundle: Optional[ResourceBundle] = PrivateAttr(default=None)
    _release: Optional[ResourceRelease] = PrivateAttr(default=None)

    @classmethod
    def from_env(cls) -> "ServiceResources":
        return cls(
            database=PostgreSQLConfig.from_env(),
            cache=ValkeyConfig.from_env(),
            broker=BrokerConfig.from_env(),
        )

    def resource_configs(self) -> Dict[str, Any]:
        """Configs keyed by resource kind, as expected by ``bootstrap``."""
        return {
            DATABASE: self.database,
            CACHE: self.cache,
            BROKER: self.broker,
        }

    def setup_for_execution(self, context: InitResourceContext) -> None:
        context.log.info("Bootstrapping service resources")
        self._bundle, self._release = bootstrap(self.resource_configs())

    def teardown_after_execution(self, context: InitResourceContext) -> None:
        if self._release is None:
            return
        self._release()
        for error in self._release.errors:
            context.log.warning(f"Release error: {error}")
        self._bundle = None

    @property
    def bundle(self) -> ResourceBundle:
        if self._bundle is None:
            raise RuntimeError("ServiceResources used before setup or after teardown")
        return self._bundle

    def get(self, kind: str) -> Any:
        return self.bundle.get(kind)
