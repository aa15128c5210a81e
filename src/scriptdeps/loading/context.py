"""Load-time resolution of binary names for script execution."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Protocol, TypeAlias

from scriptdeps.constants.runtime import HOMOGENEOUS_BINARIES
from scriptdeps.loading.index import LoadIndex
from scriptdeps.model import DependencyContext
from scriptdeps.utils.naming import binary_key

logger = logging.getLogger(__name__)

HostResolver: TypeAlias = Callable[[str], Path | None]


class LoadObserver(Protocol):
    """Hook consulted before the index; return ``None`` to pass."""

    def try_resolve(self, name: str) -> Path | None: ...


class ScriptLoadContext:
    """Answer runtime and native load requests from a dependency context.

    Homogeneous binaries (those shared with the host process) are answered
    only by ``host_resolver`` so a second copy is never loaded. Observers
    run in registration order and the first non-``None`` answer wins.
    Re-entrant requests for a name already being resolved on the same
    thread return ``None``.
    """

    def __init__(
        self,
        source: DependencyContext | LoadIndex,
        *,
        host_resolver: HostResolver | None = None,
    ) -> None:
        self._index = source.load_index if isinstance(source, DependencyContext) else source
        self._host_resolver = host_resolver
        self._observers: tuple[LoadObserver, ...] = ()
        self._native_observers: tuple[LoadObserver, ...] = ()
        self._lock = threading.Lock()
        self._local = threading.local()

    @property
    def index(self) -> LoadIndex:
        return self._index

    def add_loading_observer(self, observer: LoadObserver) -> None:
        with self._lock:
            self._observers = (*self._observers, observer)

    def add_native_loading_observer(self, observer: LoadObserver) -> None:
        with self._lock:
            self._native_observers = (*self._native_observers, observer)

    @staticmethod
    def is_homogeneous(name: str) -> bool:
        return binary_key(name) in HOMOGENEOUS_BINARIES

    def resolve(self, name: str) -> Path | None:
        """Return the path to load for runtime binary *name*, or ``None`` when unhandled."""
        key = binary_key(name)
        if not key:
            return None
        with self._single_flight("runtime", key) as entered:
            if not entered:
                logger.debug("Re-entrant load request for %s ignored", name)
                return None
            if self.is_homogeneous(key):
                return self._host_resolver(name) if self._host_resolver is not None else None
            path = _first_answer(self._observers, name)
            if path is not None:
                return path
            return self._index.runtime_path(key)

    def resolve_native(self, name: str) -> Path | None:
        """Return the path to load for native library *name*, or ``None`` when unhandled."""
        key = binary_key(name)
        if not key:
            return None
        with self._single_flight("native", key) as entered:
            if not entered:
                logger.debug("Re-entrant native load request for %s ignored", name)
                return None
            path = _first_answer(self._native_observers, name)
            if path is not None:
                return path
            return self._index.native_path(key)

    @contextmanager
    def _single_flight(self, kind: str, key: str) -> Iterator[bool]:
        in_flight: set[tuple[str, str]] | None = getattr(self._local, "in_flight", None)
        if in_flight is None:
            in_flight = set()
            self._local.in_flight = in_flight
        marker = (kind, key)
        if marker in in_flight:
            yield False
            return
        in_flight.add(marker)
        try:
            yield True
        finally:
            in_flight.discard(marker)


def lookup(source: DependencyContext | LoadIndex, name: str) -> Path | None:
    """Stateless runtime lookup of *name* without observers or host handling."""
    index = source.load_index if isinstance(source, DependencyContext) else source
    return index.runtime_path(name)


def _first_answer(observers: tuple[LoadObserver, ...], name: str) -> Path | None:
    for observer in observers:
        path = observer.try_resolve(name)
        if path is not None:
            return path
    return None
