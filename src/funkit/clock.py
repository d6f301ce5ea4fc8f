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

"""Monotonic time source for expiring caches.

:func:`funkit.suppliers.memoize_with_expiration` measures its validity
window on a :class:`MonotonicClock` passed in by the caller. Production code
uses :data:`SYSTEM_CLOCK`; tests move a :class:`FakeClock` forward instead
of sleeping::

    clock = FakeClock()
    cached = memoize_with_expiration(load, 30.0, clock=clock)
    cached()
    clock.advance(31)
    cached()  # recomputes, no real delay
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from typing import Final, Protocol, runtime_checkable


@runtime_checkable
class MonotonicClock(Protocol):
    """Source of monotonic seconds.

    Only differences between two readings are meaningful. Readings never go
    backwards.
    """

    def monotonic(self) -> float: ...


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Clock backed by ``time.monotonic()``."""

    def monotonic(self) -> float:
        return time.monotonic()


SYSTEM_CLOCK: Final[MonotonicClock] = SystemClock()


@dataclass
class FakeClock:
    """Manually driven clock for deterministic tests. Thread-safe."""

    _monotonic: float = 0.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def monotonic(self) -> float:
        with self._lock:
            return self._monotonic

    def advance(self, seconds: float) -> None:
        """Move the clock forward by ``seconds``.

        Raises:
            ValueError: If seconds is negative.
        """
        if seconds < 0:
            msg = "Cannot advance time by negative seconds"
            raise ValueError(msg)
        with self._lock:
            self._monotonic += seconds


__all__ = ["SYSTEM_CLOCK", "FakeClock", "MonotonicClock", "SystemClock"]
