"""Entry points used by the embedding service

    bundle, release = bootstrap(configs)
    try:
        serve(bundle)
    finally:
        release()

or, with release guaranteed on every exit path:

    with managed_resources(configs) as bundle:
        serve(bundle)
"""

from contextlib import contextmanager
from typing import Any, Generator, List, Mapping, Optional, Sequence, Tuple

from service_bootstrap.lifecycle import (
    LifecycleManager,
    ResourceBundle,
    ResourceConnector,
    ResourceRelease,
)
from service_bootstrap.resources.broker_resource import BrokerConnector
from service_bootstrap.resources.postgresql_resource import PostgreSQLConnector
from service_bootstrap.resources.valkey_resource import ValkeyConnector


def default_connectors() -> List[ResourceConnector]:
    """Database, cache and broker connectors in declared order."""
    return [PostgreSQLConnector(), ValkeyConnector(), BrokerConnector()]


def bootstrap(
    configs: Mapping[str, Any],
    connectors: Optional[Sequence[ResourceConnector]] = None,
) -> Tuple[ResourceBundle, ResourceRelease]:
    """Acquire every resource or none of them.

    Args:
        configs: One config per resource kind
        connectors: Connectors in acquisition order, defaults to
            ``default_connectors()``

    Returns:
        The bundle and its one-shot release callable

    Raises:
        BootstrapError: If any resource could not be connected or verified
    """
    if connectors is None:
        connectors = default_connectors()
    return LifecycleManager(connectors).bootstrap(configs)


@contextmanager
def managed_resources(
    configs: Mapping[str, Any],
    connectors: Optional[Sequence[ResourceConnector]] = None,
) -> Generator[ResourceBundle, None, None]:
    """Bootstrap, yield the bundle, and release it when the block exits."""
    bundle, release = bootstrap(configs, connectors)
    try:
        yield bundle
    finally:
        release()
