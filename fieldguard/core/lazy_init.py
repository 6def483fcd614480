"""Once-only Lazy Initialization — race-free construction of process-wide values.

Invariants:
    - builder() runs at most once per successful initialization
    - Concurrent first callers block until the single build finishes, then share its result
    - After initialization, get() is a plain attribute read (no lock taken)
    - A failing builder caches nothing: the exception propagates and the next get() retries

Design Decisions:
    - Double-checked threading.Lock over functools.lru_cache: lru_cache may run the
      builder twice under a race, which would compile patterns twice
    - Failures not cached: a SchemaError must keep surfacing (readiness stays 503)
      rather than being memoized into a half-built value
"""

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    """A value built on first access, exactly once, shared read-only after."""

    def __init__(self, builder: Callable[[], T]):
        self._builder = builder
        self._lock = threading.Lock()
        self._value: object = _UNSET

    @property
    def initialized(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        value = self._value
        if value is not _UNSET:
            return value  # type: ignore[return-value]
        with self._lock:
            if self._value is _UNSET:
                self._value = self._builder()
            return self._value  # type: ignore[return-value]
