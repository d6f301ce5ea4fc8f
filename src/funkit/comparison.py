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

"""Three-way comparison results."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol, Self

from .errors import Unhandled


class _Orderable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...  # noqa: ANN401


class Comparison(Enum):
    """Outcome of comparing two values."""

    LESSER = "lesser"
    EQUAL = "equal"
    GREATER = "greater"

    @classmethod
    def from_int(cls, compare_result: float) -> Self:
        """Map the sign of a ``cmp``-style result to a member.

        Raises:
            Unhandled: If the value has no sign, e.g. ``NaN``.
        """
        if compare_result == 0:
            return cls.EQUAL
        if compare_result < 0:
            return cls.LESSER
        if compare_result > 0:
            return cls.GREATER
        raise Unhandled.for_float(compare_result)

    @classmethod
    def compare[T: _Orderable](
        cls, a: T, b: T, *, key: Callable[[T], _Orderable] | None = None
    ) -> Self:
        """Compare ``a`` and ``b`` by natural ordering, or through ``key``."""
        left: _Orderable = a if key is None else key(a)
        right: _Orderable = b if key is None else key(b)
        if left < right:
            return cls.LESSER
        if right < left:
            return cls.GREATER
        return cls.EQUAL

    @classmethod
    def compare_with[T](cls, comparator: Callable[[T, T], float], a: T, b: T) -> Self:
        """Compare through a function returning a negative, zero or positive number."""
        return cls.from_int(comparator(a, b))

    def lesser_equal_greater[T](self, lesser: T, equal: T, greater: T) -> T:
        """Return the argument matching this member."""
        match self:
            case Comparison.LESSER:
                return lesser
            case Comparison.EQUAL:
                return equal
            case Comparison.GREATER:
                return greater
            case _:  # pragma: no cover - closed enum
                raise Unhandled.for_enum(self)


__all__ = ["Comparison"]
