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

"""Invertible, composable conversions between two types.

A :class:`Converter` pairs a forward function ``A -> B`` with a backward
function ``B -> A``. Neither direction may produce ``None``; a function that
does raises :class:`~funkit.errors.NullValueError` at the call, not later.

Converters compose and reverse without losing the pairing::

    to_int = Converter.from_functions(int, str, "to_int")
    to_float = Converter.from_functions(float, int, "to_float")

    chain = to_int.and_then(to_float)
    chain.convert_non_null("12")   # 12.0
    chain.revert_non_null(12.0)    # "12"
    to_int.reverse().convert_non_null(7)  # "7"
    to_int.reverse().reverse() is to_int  # True

Laws
----
- ``f.and_then(g).and_then(h)`` and ``f.and_then(g.and_then(h))`` convert and
  revert identically.
- ``f.reverse().reverse()`` returns ``f`` itself, so reversal never nests
  wrappers.

Implementations are immutable and safe to share between threads as long as
the wrapped functions are.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import override

from ._guards import require_non_null
from .dbc import ContractResult, ensure, require


def _accepts_converter(
    receiver: Converter[object, object], following: object
) -> ContractResult:
    return (
        isinstance(following, Converter),
        f"and_then expects a Converter, got {type(following).__name__}",
    )


def _reverses_back_to_receiver(
    receiver: Converter[object, object],
    *,
    result: Converter[object, object] | None = None,
    exception: BaseException | None = None,
) -> ContractResult:
    if exception is not None:
        return True
    return (
        result is not None and result.reverse() is receiver,
        "reverse().reverse() must return the original converter",
    )


class Converter[A, B](ABC):
    """Bidirectional conversion with a non-null contract on both directions."""

    __slots__ = ()

    @staticmethod
    def from_functions[X, Y](
        forward: Callable[[X], Y | None],
        backward: Callable[[Y], X | None],
        name: str,
    ) -> Converter[X, Y]:
        """Build a converter from a pair of functions.

        ``name`` is only used for diagnostics; it is what ``str()`` returns.

        Raises:
            NullValueError: If any argument is ``None``.
        """
        return FunctionConverter(
            require_non_null(forward, "Converter forward function"),
            require_non_null(backward, "Converter backward function"),
            require_non_null(name, "Converter name"),
        )

    @abstractmethod
    def convert_non_null(self, a: A) -> B:
        """Convert ``a`` forward."""

    @abstractmethod
    def revert_non_null(self, b: B) -> A:
        """Convert ``b`` backward."""

    def __call__(self, a: A) -> B:
        return self.convert_non_null(a)

    @require(_accepts_converter)
    def and_then[C](self, following: Converter[B, C]) -> Converter[A, C]:
        """Return ``following`` applied after this converter.

        Reverting the composition reverts ``following`` first.
        """
        return ConverterComposition(
            self, require_non_null(following, "and_then following")
        )

    @ensure(_reverses_back_to_receiver)
    def reverse(self) -> Converter[B, A]:
        """Return the converter with both directions swapped."""
        return ReverseConverter(self)

    def convert_all(self, items: Iterable[A]) -> Iterable[B]:
        """Return a lazy view converting each element of ``items`` on demand.

        Every ``iter()`` call pulls from a new iterator over ``items``; when
        ``items`` is itself a one-shot iterator, the view is single-pass too.
        """
        return ConvertedIterable(self, require_non_null(items, "convert_all items"))


@dataclass(frozen=True, slots=True)
class FunctionConverter[A, B](Converter[A, B]):
    """Converter backed by a forward and a backward function.

    Two instances are equal when they wrap equal function pairs; the name does
    not take part in equality.
    """

    forward: Callable[[A], B | None]
    backward: Callable[[B], A | None]
    name: str = field(compare=False)

    @override
    def convert_non_null(self, a: A) -> B:
        value = require_non_null(a, f"{self.name} input")
        return require_non_null(self.forward(value), f"{self.name} forward result")

    @override
    def revert_non_null(self, b: B) -> A:
        value = require_non_null(b, f"{self.name} input")
        return require_non_null(self.backward(value), f"{self.name} backward result")

    @override
    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ConverterComposition[A, B, C](Converter[A, C]):
    """``second`` applied after ``first``."""

    first: Converter[A, B]
    second: Converter[B, C]

    @override
    def convert_non_null(self, a: A) -> C:
        return self.second.convert_non_null(self.first.convert_non_null(a))

    @override
    def revert_non_null(self, b: C) -> A:
        return self.first.revert_non_null(self.second.revert_non_null(b))

    @override
    def __str__(self) -> str:
        return f"{self.first}.and_then({self.second})"


@dataclass(frozen=True, slots=True)
class ReverseConverter[A, B](Converter[A, B]):
    """``original`` with forward and backward swapped."""

    original: Converter[B, A]

    @override
    def convert_non_null(self, a: A) -> B:
        return self.original.revert_non_null(a)

    @override
    def revert_non_null(self, b: B) -> A:
        return self.original.convert_non_null(b)

    @override
    def reverse(self) -> Converter[B, A]:
        return self.original

    @override
    def __str__(self) -> str:
        return f"{self.original}.reverse()"


@dataclass(frozen=True, slots=True)
class ConvertedIterable[A, B]:
    """Lazy view returned by :meth:`Converter.convert_all`."""

    converter: Converter[A, B]
    source: Iterable[A]

    def __iter__(self) -> Iterator[B]:
        return map(self.converter.convert_non_null, self.source)


__all__ = [
    "ConvertedIterable",
    "Converter",
    "ConverterComposition",
    "FunctionConverter",
    "ReverseConverter",
]
