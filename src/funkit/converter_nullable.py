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

"""Converters that pass ``None`` through untouched.

:class:`ConverterNullable` follows the same composition laws as
:class:`~funkit.converter.Converter` but places no contract on ``None``:
both directions may receive and return it, and handling it is up to the
wrapped functions. It is the converter type accepted by
:meth:`funkit.box.NullableBox.map`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import override

from ._guards import require_non_null


class ConverterNullable[A, B](ABC):
    """Bidirectional conversion where either side may be ``None``."""

    __slots__ = ()

    @staticmethod
    def from_functions[X, Y](
        forward: Callable[[X | None], Y | None],
        backward: Callable[[Y | None], X | None],
        name: str | None = None,
    ) -> ConverterNullable[X, Y]:
        """Build a converter from two functions.

        Without ``name``, the forward function's qualified name is used.
        """
        forward = require_non_null(forward, "ConverterNullable forward function")
        backward = require_non_null(backward, "ConverterNullable backward function")
        if name is None:
            name = getattr(forward, "__qualname__", repr(forward))
        return _FunctionConverterNullable(forward, backward, name)

    @abstractmethod
    def convert(self, a: A | None) -> B | None: ...

    @abstractmethod
    def revert(self, b: B | None) -> A | None: ...

    def __call__(self, a: A | None) -> B | None:
        return self.convert(a)

    def and_then[C](self, following: ConverterNullable[B, C]) -> ConverterNullable[A, C]:
        following = require_non_null(following, "and_then following")
        return ConverterNullable.from_functions(
            lambda a: following.convert(self.convert(a)),
            lambda c: self.revert(following.revert(c)),
            f"{self} and_then {following}",
        )

    def reverse(self) -> ConverterNullable[B, A]:
        return _ReverseConverterNullable(self)


@dataclass(frozen=True, slots=True, eq=False)
class _FunctionConverterNullable[A, B](ConverterNullable[A, B]):
    forward: Callable[[A | None], B | None]
    backward: Callable[[B | None], A | None]
    name: str

    @override
    def convert(self, a: A | None) -> B | None:
        return self.forward(a)

    @override
    def revert(self, b: B | None) -> A | None:
        return self.backward(b)

    @override
    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class _ReverseConverterNullable[A, B](ConverterNullable[A, B]):
    original: ConverterNullable[B, A]

    @override
    def convert(self, a: A | None) -> B | None:
        return self.original.revert(a)

    @override
    def revert(self, b: B | None) -> A | None:
        return self.original.convert(b)

    @override
    def reverse(self) -> ConverterNullable[B, A]:
        return self.original

    @override
    def __str__(self) -> str:
        return f"{self.original}.reverse()"


__all__ = ["ConverterNullable"]
