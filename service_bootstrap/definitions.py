"""Top-level Dagster definitions loader

Exposes the service resources under the "services" key so ops and assets
can declare them as a dependency. Connections are opened when a run starts,
not at import time.
"""

from dagster import Definitions

from service_bootstrap.resources.service_resources import ServiceResources

# Settings come from POSTGRES_*, VALKEY_* and RABBITMQ_* environment variables
defs = Definitions(
    resources={
        "services": ServiceResources.from_env(),
    },
)
