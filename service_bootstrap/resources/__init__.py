"""Resources package

Connectors and connection configs for each external resource kind.
The Dagster ``ServiceResources`` wrapper lives in ``service_resources``
and is imported from there directly.
"""

from .postgresql_resource import PostgreSQLConfig, PostgreSQLConnector
from .valkey_resource import ValkeyConfig, ValkeyConnector
from .broker_resource import BrokerConfig, BrokerConnector
from .mongodb_resource import MongoDBConfig, MongoDBConnector

__all__ = [
    "PostgreSQLConfig",
    "PostgreSQLConnector",
    "ValkeyConfig",
    "ValkeyConnector",
    "BrokerConfig",
    "BrokerConnector",
    "MongoDBConfig",
    "MongoDBConnector",
]
