"""Read-only aggregate of live resource handles"""

from types import MappingProxyType
from typing import Any, Iterable, Iterator, Tuple

from .connector import BROKER, CACHE, DATABASE
from .errors import ResourceNotFoundError


class ResourceBundle:
    """Fully-populated set of handles produced by a successful bootstrap.

    Handles are kept in acquisition order, which is also the reverse of
    the order in which they get released.
    """

    __slots__ = ("_handles",)

    def __init__(self, handles: Iterable[Tuple[str, Any]]):
        staged = {}
        for kind, handle in handles:
            if kind in staged:
                raise ValueError(f"Duplicate resource kind in bundle: {kind}")
            staged[kind] = handle
        self._handles = MappingProxyType(staged)

    def get(self, kind: str) -> Any:
        """Return the live handle for ``kind``.

        Raises:
            ResourceNotFoundError: If ``kind`` was never declared
        """
        try:
            return self._handles[kind]
        except KeyError:
            raise ResourceNotFoundError(kind, self._handles.keys()) from None

    @property
    def kinds(self) -> Tuple[str, ...]:
        return tuple(self._handles)

    def items(self) -> Iterator[Tuple[str, Any]]:
        return iter(self._handles.items())

    @property
    def database(self) -> Any:
        return self.get(DATABASE)

    @property
    def cache(self) -> Any:
        return self.get(CACHE)

    @property
    def broker(self) -> Any:
        return self.get(BROKER)

    def __contains__(self, kind: object) -> bool:
        return kind in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def __repr__(self) -> str:
        return f"ResourceBundle(kinds={list(self._handles)})"
