"""Ordered, all-or-nothing acquisition of external resources

The LifecycleManager walks its connectors in declared order, connecting and
verifying each one. The first failure rolls back everything acquired so far
in reverse order and surfaces a single BootstrapError. On success the staged
handles move into a ResourceBundle together with a one-shot release callable.
"""

import threading
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from dagster import get_dagster_logger

from .bundle import ResourceBundle
from .connector import ResourceConnector
from .errors import (
    BootstrapError,
    ResourceCloseError,
    ResourceConnectionError,
    ResourceUnreachableError,
)

logger = get_dagster_logger(__name__)


class LifecycleState(str, Enum):
    IDLE = "idle"
    ACQUIRING = "acquiring"
    ROLLING_BACK = "rolling_back"
    FAILED = "failed"
    READY = "ready"
    RELEASED = "released"


def _close_all(
    connectors: Mapping[str, ResourceConnector],
    handles: Sequence[Tuple[str, Any]],
) -> List[ResourceCloseError]:
    """Close ``handles`` in the given order, collecting instead of raising."""
    errors = []
    for kind, handle in handles:
        try:
            connectors[kind].close(handle)
            logger.info(f"Closed {kind}")
        except Exception as e:
            logger.error(f"Error while closing {kind}: {e}")
            errors.append(ResourceCloseError(kind, e))
    return errors


class ResourceRelease:
    """One-shot release of a bundle.

    The first call closes every handle in reverse acquisition order. Later
    calls, including ones racing the first, return without doing anything.
    Close errors are logged and kept in ``errors``; they never propagate.
    """

    def __init__(
        self,
        connectors: Mapping[str, ResourceConnector],
        bundle: ResourceBundle,
        on_released=None,
    ):
        self._connectors = connectors
        self._bundle = bundle
        self._on_released = on_released
        self._lock = threading.Lock()
        self._released = False
        self.errors: List[ResourceCloseError] = []

    @property
    def released(self) -> bool:
        return self._released

    def __call__(self) -> None:
        with self._lock:
            if self._released:
                return
            self._released = True

            logger.info(f"Releasing resources: {', '.join(reversed(self._bundle.kinds))}")
            handles = list(self._bundle.items())
            handles.reverse()
            self.errors = _close_all(self._connectors, handles)

            if self.errors:
                logger.warning(f"Release finished with {len(self.errors)} close error(s)")
            else:
                logger.info("All resources released")

            if self._on_released is not None:
                self._on_released()


class LifecycleManager:
    """Acquire a declared set of resources, or none of them.

    Args:
        connectors: Connectors in acquisition order. Kinds must be unique.

    A manager runs a single bootstrap attempt. To retry after a failure,
    construct a new manager.
    """

    def __init__(self, connectors: Sequence[ResourceConnector]):
        self._connectors = {}
        for connector in connectors:
            if connector.kind in self._connectors:
                raise ValueError(f"Duplicate connector for resource kind '{connector.kind}'")
            self._connectors[connector.kind] = connector

        self.state = LifecycleState.IDLE
        self._staged: List[Tuple[str, Any]] = []

    @property
    def order(self) -> Tuple[str, ...]:
        return tuple(self._connectors)

    def bootstrap(self, configs: Mapping[str, Any]) -> Tuple[ResourceBundle, ResourceRelease]:
        """Connect and verify every resource in declared order.

        Args:
            configs: One config per resource kind

        Returns:
            The populated bundle and its release callable

        Raises:
            BootstrapError: If any resource fails to connect or verify.
                Everything acquired before the failure has been closed.
            RuntimeError: If this manager already ran an attempt
        """
        if self.state is not LifecycleState.IDLE:
            raise RuntimeError(
                f"Bootstrap already attempted (state: {self.state.value}); "
                "create a new LifecycleManager to retry"
            )

        for kind in self._connectors:
            if kind not in configs:
                self.state = LifecycleState.FAILED
                raise BootstrapError(kind, KeyError(f"No configuration for '{kind}'"), "config")

        self.state = LifecycleState.ACQUIRING
        try:
            for index, (kind, connector) in enumerate(self._connectors.items()):
                self._acquire(index, kind, connector, configs[kind])
        except (ResourceConnectionError, ResourceUnreachableError) as e:
            rollback_errors = self._rollback()
            self.state = LifecycleState.FAILED
            raise BootstrapError(e.kind, e.cause, e.stage, rollback_errors) from e
        except BaseException:
            # Interrupted mid-acquisition: still leave nothing open
            self._rollback()
            self.state = LifecycleState.FAILED
            raise

        staged, self._staged = self._staged, []
        bundle = ResourceBundle(staged)
        self.state = LifecycleState.READY
        logger.info(f"All {len(bundle)} resources ready: {', '.join(bundle.kinds)}")
        return bundle, ResourceRelease(self._connectors, bundle, self._mark_released)

    def _acquire(self, index: int, kind: str, connector: ResourceConnector, config: Any) -> None:
        logger.info(f"[{index + 1}/{len(self._connectors)}] Connecting to {kind}")
        try:
            handle = connector.connect(config)
        except ResourceConnectionError as e:
            if e.kind != kind:
                raise ResourceConnectionError(kind, e.cause) from e
            raise
        except Exception as e:
            logger.error(f"Failed to connect to {kind}: {e}")
            raise ResourceConnectionError(kind, e) from e

        # Staged before verify so a failed liveness check still closes it
        self._staged.append((kind, handle))

        try:
            connector.verify(handle, config)
        except ResourceUnreachableError as e:
            if e.kind != kind:
                raise ResourceUnreachableError(kind, e.cause) from e
            raise
        except Exception as e:
            logger.error(f"{kind} did not answer liveness check: {e}")
            raise ResourceUnreachableError(kind, e) from e

        logger.info(f"✓ {kind} connected and verified")

    def _rollback(self) -> List[ResourceCloseError]:
        self.state = LifecycleState.ROLLING_BACK
        staged, self._staged = self._staged, []
        if not staged:
            return []

        staged.reverse()
        logger.warning(f"Rolling back: {', '.join(kind for kind, _ in staged)}")
        return _close_all(self._connectors, staged)

    def _mark_released(self) -> None:
        self.state = LifecycleState.RELEASED
