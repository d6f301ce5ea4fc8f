# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Zero-argument computations and their memoizing wrappers.

A supplier is any zero-argument callable. The wrappers returned by
:func:`memoize` and :func:`memoize_with_expiration` are suppliers themselves
and also expose ``get()``.

Memoization guarantees
----------------------
Both wrappers use double-checked locking: the fast path reads the cache
without locking, and the slow path re-checks the cache under a per-instance
lock before computing. Concurrent first callers therefore trigger exactly one
computation (per validity window for the expiring variant) and all of them
observe its result. A computation that raises caches nothing, so the next
call tries again.

Example::

    config = memoize(load_config)
    config()  # loads
    config()  # cached

    token = memoize_with_expiration(fetch_token, timedelta(minutes=5))
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import timedelta
from typing import Final, override

from ._guards import require_non_null
from .clock import SYSTEM_CLOCK, MonotonicClock
from .errors import ContractViolationError
from .logging import StructuredLogger, get_logger

type Supplier[T] = Callable[[], T]

logger: StructuredLogger = get_logger(__name__, context={"component": "suppliers"})

_UNSET: Final = object()


class MemoizingSupplier[T]:
    """Supplier that computes its delegate once and caches the result."""

    __slots__ = ("_delegate", "_initialized", "_lock", "_value")

    def __init__(self, delegate: Supplier[T]) -> None:
        self._delegate = delegate
        self._lock = threading.Lock()
        self._initialized = False
        self._value: T | object = _UNSET

    def get(self) -> T:
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    value = self._delegate()
                    self._value = value
                    self._initialized = True
                    logger.debug(
                        "Memoized value computed.",
                        event="suppliers.memoize.computed",
                        context={"delegate": repr(self._delegate)},
                    )
                    return value
        return self._value  # type: ignore[return-value]

    def __call__(self) -> T:
        return self.get()

    @override
    def __repr__(self) -> str:
        return f"Suppliers.memoize({self._delegate!r})"


class ExpiringMemoizingSupplier[T]:
    """Supplier caching its delegate's result for a fixed duration.

    The window starts when a computation completes. ``expires_at`` is ``None``
    until the first computation succeeds.
    """

    __slots__ = ("_clock", "_delegate", "_duration", "_expires_at", "_lock", "_value")

    def __init__(
        self, delegate: Supplier[T], duration: float, clock: MonotonicClock
    ) -> None:
        self._delegate = delegate
        self._duration = duration
        self._clock = clock
        self._lock = threading.Lock()
        self._expires_at: float | None = None
        self._value: T | object = _UNSET

    def get(self) -> T:
        expires_at = self._expires_at
        if expires_at is None or self._clock.monotonic() >= expires_at:
            with self._lock:
                # Another caller may have refreshed the cache while we waited.
                if expires_at == self._expires_at:
                    value = self._delegate()
                    self._value = value
                    self._expires_at = self._clock.monotonic() + self._duration
                    logger.debug(
                        "Expiring memoized value computed.",
                        event="suppliers.expiring.computed",
                        context={
                            "delegate": repr(self._delegate),
                            "duration_seconds": self._duration,
                        },
                    )
                    return value
        return self._value  # type: ignore[return-value]

    def __call__(self) -> T:
        return self.get()

    @override
    def __repr__(self) -> str:
        return (
            f"Suppliers.memoize_with_expiration({self._delegate!r}, {self._duration}s)"
        )


class SynchronizedSupplier[T]:
    """Supplier serializing every call to its delegate through one lock."""

    __slots__ = ("_delegate", "_lock")

    def __init__(self, delegate: Supplier[T]) -> None:
        self._delegate = delegate
        self._lock = threading.Lock()

    def get(self) -> T:
        with self._lock:
            return self._delegate()

    def __call__(self) -> T:
        return self.get()

    @override
    def __repr__(self) -> str:
        return f"Suppliers.synchronized_supplier({self._delegate!r})"


def memoize[T](delegate: Supplier[T]) -> MemoizingSupplier[T]:
    """Return a supplier computing ``delegate`` on first use only.

    Wrapping an already memoized supplier returns it unchanged.
    """
    if isinstance(delegate, MemoizingSupplier):
        return delegate  # pyright: ignore[reportUnknownVariableType]
    return MemoizingSupplier(require_non_null(delegate, "memoize delegate"))


def memoize_with_expiration[T](
    delegate: Supplier[T],
    duration: float | timedelta,
    *,
    clock: MonotonicClock = SYSTEM_CLOCK,
) -> ExpiringMemoizingSupplier[T]:
    """Return a supplier recomputing ``delegate`` once ``duration`` has elapsed.

    Args:
        delegate: The computation to cache.
        duration: Validity window in seconds or as a ``timedelta``.
        clock: Monotonic time source measuring the window.

    Raises:
        ContractViolationError: If duration is not strictly positive.
    """
    seconds = (
        duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    )
    if not seconds > 0:
        msg = f"Expiration duration must be positive, got {duration!r}"
        raise ContractViolationError(msg)
    return ExpiringMemoizingSupplier(
        require_non_null(delegate, "memoize_with_expiration delegate"), seconds, clock
    )


def synchronized_supplier[T](delegate: Supplier[T]) -> SynchronizedSupplier[T]:
    return SynchronizedSupplier(require_non_null(delegate, "synchronized delegate"))


def compose[F, T](function: Callable[[F], T], supplier: Supplier[F]) -> Supplier[T]:
    """Return a supplier applying ``function`` to each fresh ``supplier()`` result."""

    def composed() -> T:
        return function(supplier())

    return composed


def of_instance[T](instance: T) -> Supplier[T]:
    """Return a supplier that always returns ``instance``."""
    return lambda: instance


def supplier_function[T]() -> Callable[[Supplier[T]], T]:
    """Return a function that evaluates the supplier it is given."""
    return lambda supplier: supplier()


__all__ = [
    "ExpiringMemoizingSupplier",
    "MemoizingSupplier",
    "Supplier",
    "SynchronizedSupplier",
    "compose",
    "memoize",
    "memoize_with_expiration",
    "of_instance",
    "supplier_function",
    "synchronized_supplier",
]
