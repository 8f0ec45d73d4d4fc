"""Fake connector implementations for testing without real services

Every fake records what happened to it in a shared event log so tests can
assert on ordering across connectors.
"""

import threading
from typing import List, Optional, Tuple


class FakeHandle:
    """Stand-in for a live connection."""

    def __init__(self, kind: str, serial: int):
        self.kind = kind
        self.serial = serial
        self.closed = False

    def __repr__(self):
        return f"FakeHandle({self.kind}#{self.serial})"


class FakeConfig:
    """Minimal immutable-looking config."""

    def __init__(self, name: str, connect_timeout: float = 1.0, verify_timeout: float = 0.5):
        self.name = name
        self.connect_timeout = connect_timeout
        self.verify_timeout = verify_timeout


class EventLog:
    """Ordered, thread-safe record of (action, kind) pairs."""

    def __init__(self):
        self._events: List[Tuple[str, str]] = []
        self._lock = threading.Lock()

    def record(self, action: str, kind: str):
        with self._lock:
            self._events.append((action, kind))

    @property
    def events(self) -> List[Tuple[str, str]]:
        with self._lock:
            return list(self._events)

    def of(self, action: str) -> List[str]:
        """Kinds that saw ``action``, in order."""
        return [kind for a, kind in self.events if a == action]


class FakeConnector:
    """Connector whose connect / verify / close can be told to fail."""

    def __init__(
        self,
        kind: str,
        log: EventLog,
        connect_error: Optional[BaseException] = None,
        verify_error: Optional[BaseException] = None,
        close_error: Optional[BaseException] = None,
    ):
        self.kind = kind
        self.log = log
        self.connect_error = connect_error
        self.verify_error = verify_error
        self.close_error = close_error
        self.handles: List[FakeHandle] = []
        self.configs_seen = []

    @property
    def connect_calls(self) -> int:
        return self.log.of("connect").count(self.kind)

    @property
    def close_calls(self) -> int:
        return self.log.of("close").count(self.kind)

    def connect(self, config):
        self.log.record("connect", self.kind)
        self.configs_seen.append(config)
        if self.connect_error is not None:
            raise self.connect_error
        handle = FakeHandle(self.kind, len(self.handles))
        self.handles.append(handle)
        return handle

    def verify(self, handle, config):
        self.log.record("verify", self.kind)
        if self.verify_error is not None:
            raise self.verify_error

    def close(self, handle):
        self.log.record("close", self.kind)
        handle.closed = True
        if self.close_error is not None:
            raise self.close_error

    def live_handles(self) -> List[FakeHandle]:
        return [handle for handle in self.handles if not handle.closed]
