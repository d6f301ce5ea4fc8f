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

"""Base exception hierarchy for :mod:`funkit`."""

from __future__ import annotations

from enum import Enum
from typing import Self


class FunkitError(Exception):
    """Base class for all funkit exceptions.

    Every exception raised by the library itself derives from this class, so
    callers can separate contract violations from failures raised by their own
    callables, which always propagate unmodified.

    Example:
        Routing library errors to an error sink::

            try:
                box.set(value)
            except FunkitError as e:
                sink(e)

    Note:
        Subclasses also inherit from standard exception types (``ValueError``,
        ``RuntimeError``, ``AssertionError``) so generic handlers keep working.
    """


class ContractViolationError(FunkitError, ValueError):
    """Raised immediately when a call violates an argument contract.

    This is the "invalid argument" signal of the library. Common causes:

    - ``Either.create`` called with both or neither side populated
    - a non-positive duration passed to ``memoize_with_expiration``
    - a value outside the range of a primitive box
    - ``None`` where a value is required (see :class:`NullValueError`)

    Note:
        This exception also inherits from ``ValueError``.
    """


class NullValueError(ContractViolationError):
    """Raised when ``None`` appears where a non-null value is required.

    Non-null boxes, converters and the explicit ``Either`` constructors all
    reject ``None`` at the call that would store or return it. The check is
    never deferred.

    Example::

        box = Box.of("a")
        box.set(None)  # raises NullValueError
    """


class UnsupportedOperationError(FunkitError, RuntimeError):
    """Raised when an operation does not apply to the receiver.

    ``Either.get_left`` on a ``Right`` (and the mirror case) raise this. It
    marks a programming error rather than a recoverable condition.
    """


class Unhandled(FunkitError, AssertionError):
    """Raised when a closed set of cases falls through every branch.

    Reaching this indicates a logic bug in the caller or the library. The
    factories describe the value that was not handled::

        match comparison:
            case Comparison.LESSER: ...
            case _:
                raise Unhandled.for_enum(comparison)
    """

    @classmethod
    def for_class(cls, obj: object) -> Self:
        if obj is None:
            return cls("Unhandled class 'None'")
        target = obj if isinstance(obj, type) else type(obj)
        return cls(f"Unhandled class '{target.__module__}.{target.__qualname__}'")

    @classmethod
    def for_enum(cls, member: Enum | None) -> Self:
        if member is None:
            return cls("Unhandled enum value 'None'")
        return cls(
            f"Unhandled enum value '{member.name}' for enum class "
            f"'{type(member).__qualname__}'"
        )

    @classmethod
    def for_int(cls, value: int) -> Self:
        return cls(f"Unhandled integer '{value}'")

    @classmethod
    def for_float(cls, value: float) -> Self:
        return cls(f"Unhandled float '{value}'")

    @classmethod
    def for_string(cls, value: str | None) -> Self:
        return cls(f"Unhandled string '{value}'")

    @classmethod
    def for_object(cls, value: object) -> Self:
        return cls(f"Unhandled object '{value}'")


__all__ = [
    "ContractViolationError",
    "FunkitError",
    "NullValueError",
    "Unhandled",
    "UnsupportedOperationError",
]
