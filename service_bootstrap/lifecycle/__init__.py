"""Lifecycle package

Connector capability, resource bundle and the manager that acquires and
releases them.
"""

from .connector import (
    BROKER,
    CACHE,
    DATABASE,
    DEFAULT_ORDER,
    DOCUMENT_STORE,
    ResourceConnector,
)
from .bundle import ResourceBundle
from .errors import (
    BootstrapError,
    ResourceCloseError,
    ResourceConnectionError,
    ResourceLifecycleError,
    ResourceNotFoundError,
    ResourceUnreachableError,
)
from .manager import LifecycleManager, LifecycleState, ResourceRelease

__all__ = [
    # Kinds
    "DATABASE",
    "CACHE",
    "BROKER",
    "DOCUMENT_STORE",
    "DEFAULT_ORDER",

    # Core
    "ResourceConnector",
    "ResourceBundle",
    "LifecycleManager",
    "LifecycleState",
    "ResourceRelease",

    # Errors
    "ResourceLifecycleError",
    "ResourceConnectionError",
    "ResourceUnreachableError",
    "ResourceCloseError",
    "BootstrapError",
    "ResourceNotFoundError",
]
