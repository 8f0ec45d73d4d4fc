"""Connector capability shared by every resource kind

A connector knows how to connect, verify and close exactly one kind of
external resource. It holds no state of its own: the handle it returns
from ``connect`` is what the LifecycleManager keeps track of.
"""

from typing import Any, Protocol, runtime_checkable

# Built-in resource kinds
DATABASE = "database"
CACHE = "cache"
BROKER = "broker"
DOCUMENT_STORE = "document_store"

# Declared acquisition order of the default connector set
DEFAULT_ORDER = (DATABASE, CACHE, BROKER)


@runtime_checkable
class ResourceConnector(Protocol):
    """Connect / verify / close lifecycle of one resource kind."""

    kind: str

    def connect(self, config: Any) -> Any:
        """Open a session with the resource and return its handle.

        Must not double as a liveness check unless the driver itself
        guarantees one; ``verify`` is always called afterwards.
        """
        ...

    def verify(self, handle: Any, config: Any) -> None:
        """Run a lightweight round-trip bounded by ``config.verify_timeout``.

        Raises whatever the driver raises when the resource does not answer.
        """
        ...

    def close(self, handle: Any) -> None:
        """Release the handle. Errors raised here are collected by the caller."""
        ...
