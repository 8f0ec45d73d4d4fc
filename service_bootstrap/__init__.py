"""service_bootstrap

Acquires the service's external resources (database, cache, broker) all
at once or not at all, and releases them exactly once.
"""

from .lifecycle import (
    BootstrapError,
    LifecycleManager,
    ResourceBundle,
    ResourceNotFoundError,
)
from .startup import bootstrap, default_connectors, managed_resources

__version__ = "0.1.0"

__all__ = [
    "bootstrap",
    "managed_resources",
    "default_connectors",
    "LifecycleManager",
    "ResourceBundle",
    "BootstrapError",
    "ResourceNotFoundError",
]
