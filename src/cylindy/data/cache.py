"""Single-flight cached loading shared by the reference-data repositories."""

from __future__ import annotations

from concurrent.futures import Future
import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class SingleFlight(Generic[T]):
    """Run `loader` at most once at a time and cache its value.

    The first caller installs a future and performs the load; concurrent
    callers block on that same future. A failed load is raised to every
    waiter and the slot is reset, so the next call retries.
    """

    def __init__(self, loader: Callable[[], T]) -> None:
        self._loader = loader
        self._lock = threading.Lock()
        self._future: Future[T] | None = None

    def get(self) -> T:
        with self._lock:
            future = self._future
            owner = future is None
            if owner:
                future = Future()
                self._future = future

        if owner:
            try:
                value = self._loader()
            except BaseException as exc:
                with self._lock:
                    if self._future is future:
                        self._future = None
                future.set_exception(exc)
                raise
            future.set_result(value)
            return value

        return future.result()

    @property
    def loaded(self) -> bool:
        with self._lock:
            future = self._future
        return future is not None and future.done() and future.exception() is None

    def clear(self) -> None:
        """Drop the cached value; the next `get` loads again."""
        with self._lock:
            self._future = None
