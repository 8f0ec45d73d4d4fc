"""Error taxonomy for resource acquisition and release

Connector failures are wrapped into these types by the LifecycleManager;
callers of bootstrap only ever see a BootstrapError.
"""

from typing import List, Optional


class ResourceLifecycleError(Exception):
    """Base class for every error raised by the lifecycle layer."""
    pass


class ResourceConnectionError(ResourceLifecycleError):
    """Transport or authentication failure while connecting a resource."""

    stage = "connect"

    def __init__(self, kind: str, cause: BaseException):
        self.kind = kind
        self.cause = cause
        super().__init__(f"Failed to connect to {kind}: {cause}")


class ResourceUnreachableError(ResourceLifecycleError):
    """Connect succeeded but the liveness check did not."""

    stage = "verify"

    def __init__(self, kind: str, cause: BaseException):
        self.kind = kind
        self.cause = cause
        super().__init__(f"{kind} is unreachable: {cause}")


class ResourceCloseError(ResourceLifecycleError):
    """Non-fatal error raised by a connector while closing a handle."""

    def __init__(self, kind: str, cause: BaseException):
        self.kind = kind
        self.cause = cause
        super().__init__(f"Failed to close {kind}: {cause}")


class BootstrapError(ResourceLifecycleError):
    """Aggregated failure of a bootstrap attempt.

    Attributes:
        kind: The resource kind that failed first
        cause: The underlying error of that failure
        stage: Where it failed ("config", "connect" or "verify")
        rollback_errors: Close errors hit while rolling back, in close order.
            Reported for observability only; they never replace ``cause``.
    """

    def __init__(
        self,
        kind: str,
        cause: BaseException,
        stage: str,
        rollback_errors: Optional[List[ResourceCloseError]] = None,
    ):
        self.kind = kind
        self.cause = cause
        self.stage = stage
        self.rollback_errors = list(rollback_errors or [])
        message = f"Bootstrap failed at {kind} ({stage}): {cause}"
        if self.rollback_errors:
            message += f" [{len(self.rollback_errors)} error(s) during rollback]"
        super().__init__(message)


class ResourceNotFoundError(ResourceLifecycleError, LookupError):
    """Requested a resource kind that is not part of the bundle."""

    def __init__(self, kind: str, available):
        self.kind = kind
        self.available = tuple(available)
        super().__init__(
            f"Unknown resource kind '{kind}'. Available: {', '.join(self.available)}"
        )
