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

"""Two-armed disjoint union.

An :class:`Either` holds exactly one non-null value, tagged as left or right.
The two variants are the frozen dataclasses :class:`Left` and :class:`Right`,
so values can be consumed with ``match``::

    match parse(text):
        case Left(error):
            report(error)
        case Right(value):
            use(value)

or through the dispatch helpers::

    outcome = Either.create_right(5)
    outcome.fold(len, lambda n: n * 2)  # 10

Equality is side-aware: ``Left(1) != Right(1)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, override

from ._guards import require_non_null
from .dbc import ContractResult, invariant
from .errors import ContractViolationError, UnsupportedOperationError


def _holds_exactly_one_value(either: Either[object, object]) -> ContractResult:
    tagged = isinstance(either, Left) != isinstance(either, Right)
    if not tagged:
        return (False, f"{type(either).__name__} is neither Left nor Right")
    return (either.value is not None, "Either holds None")


class Either[L, R](ABC):
    """Exactly one of a left value or a right value, never both, never neither."""

    __slots__ = ()

    @staticmethod
    def create[X, Y](left: X | None, right: Y | None) -> Either[X, Y]:
        """Build an Either from two candidates, exactly one of which is not ``None``.

        Raises:
            ContractViolationError: If both or neither candidate is ``None``.
        """
        if left is None and right is not None:
            return Right(right)
        if left is not None and right is None:
            return Left(left)
        if left is None:
            raise ContractViolationError("Both arguments were None.")
        msg = f"Both arguments were non-None: {left} {right}"
        raise ContractViolationError(msg)

    @staticmethod
    def create_left[X, Y](value: X) -> Either[X, Y]:
        return Left(value)

    @staticmethod
    def create_right[X, Y](value: Y) -> Either[X, Y]:
        return Right(value)

    @abstractmethod
    def is_left(self) -> bool: ...

    def is_right(self) -> bool:
        return not self.is_left()

    @abstractmethod
    def get_left(self) -> L:
        """Return the left value.

        Raises:
            UnsupportedOperationError: If this is a Right.
        """

    @abstractmethod
    def get_right(self) -> R:
        """Return the right value.

        Raises:
            UnsupportedOperationError: If this is a Left.
        """

    def if_left(self, consumer: Callable[[L], object]) -> None:
        if self.is_left():
            consumer(self.get_left())

    def if_right(self, consumer: Callable[[R], object]) -> None:
        if self.is_right():
            consumer(self.get_right())

    def as_optional_left(self) -> L | None:
        return self.fold(lambda value: value, lambda _: None)

    def as_optional_right(self) -> R | None:
        return self.fold(lambda _: None, lambda value: value)

    def fold[T](self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        """Apply exactly one of the functions, chosen by side."""
        if self.is_left():
            return on_left(self.get_left())
        return on_right(self.get_right())

    def accept(
        self, on_left: Callable[[L], object], on_right: Callable[[R], object]
    ) -> None:
        """Call exactly one of the consumers, chosen by side."""
        if self.is_left():
            on_left(self.get_left())
        else:
            on_right(self.get_right())

    def map_left[T](self, mapper: Callable[[L], T]) -> Either[T, R]:
        """Map the left value; a Right is returned unchanged."""
        if self.is_left():
            return Left(mapper(self.get_left()))
        return self  # type: ignore[return-value]

    def map_right[T](self, mapper: Callable[[R], T]) -> Either[L, T]:
        """Map the right value; a Left is returned unchanged."""
        if self.is_left():
            return self  # type: ignore[return-value]
        return Right(mapper(self.get_right()))

    def accept_both(
        self,
        on_left: Callable[[L], object],
        on_right: Callable[[R], object],
        default_left: L,
        default_right: R,
    ) -> None:
        """Call both consumers, substituting a default for the absent side.

        Unlike :meth:`accept`, both observers are always notified: the
        matching side receives the stored value and the other side receives
        its default.
        """
        on_left(self.get_left() if self.is_left() else default_left)
        on_right(self.get_right() if self.is_right() else default_right)


@invariant(_holds_exactly_one_value)
@dataclass(frozen=True, slots=True)
class Left[L, R](Either[L, R]):
    value: L

    def __post_init__(self) -> None:
        require_non_null(self.value, "Either.create_left")

    @override
    def is_left(self) -> bool:
        return True

    @override
    def get_left(self) -> L:
        return self.value

    @override
    def get_right(self) -> Never:
        raise UnsupportedOperationError("get_right called on a Left")

    @override
    def __str__(self) -> str:
        return f"Left[{self.value}]"

    @override
    def __hash__(self) -> int:
        return hash((Left, self.value))


@invariant(_holds_exactly_one_value)
@dataclass(frozen=True, slots=True)
class Right[L, R](Either[L, R]):
    value: R

    def __post_init__(self) -> None:
        require_non_null(self.value, "Either.create_right")

    @override
    def is_left(self) -> bool:
        return False

    @override
    def get_left(self) -> Never:
        raise UnsupportedOperationError("get_left called on a Right")

    @override
    def get_right(self) -> R:
        return self.value

    @override
    def __str__(self) -> str:
        return f"Right[{self.value}]"

    @override
    def __hash__(self) -> int:
        return hash((Right, self.value))


__all__ = ["Either", "Left", "Right"]
