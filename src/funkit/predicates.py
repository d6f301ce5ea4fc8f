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

"""Predicate combinators.

A predicate is any callable returning ``bool``. The combinators copy their
components at construction, so later changes to a list passed to
:func:`and_` or :func:`or_` do not affect the predicate::

    is_small_even = and_(lambda n: n % 2 == 0, lambda n: n < 10)
    is_small_even(4)   # True
    or_([])(anything)  # False
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass
from typing import override

from ._guards import require_non_null

type Predicate[T] = Callable[[T], bool]


def always_true[T]() -> Predicate[T]:
    return lambda _: True


def always_false[T]() -> Predicate[T]:
    return lambda _: False


def is_none[T]() -> Predicate[T | None]:
    return lambda value: value is None


def not_none[T]() -> Predicate[T | None]:
    return lambda value: value is not None


def not_[T](predicate: Predicate[T]) -> Predicate[T]:
    """Return the negation of ``predicate``."""
    require_non_null(predicate, "not_ predicate")
    return lambda value: not predicate(value)


@dataclass(frozen=True, slots=True)
class _AndPredicate[T]:
    components: tuple[Predicate[T], ...]

    def __call__(self, value: T) -> bool:
        return all(component(value) for component in self.components)

    @override
    def __str__(self) -> str:
        return f"and_({', '.join(map(str, self.components))})"


@dataclass(frozen=True, slots=True)
class _OrPredicate[T]:
    components: tuple[Predicate[T], ...]

    def __call__(self, value: T) -> bool:
        return any(component(value) for component in self.components)

    @override
    def __str__(self) -> str:
        return f"or_({', '.join(map(str, self.components))})"


def _defensive_copy[T](
    components: tuple[Predicate[T] | Iterable[Predicate[T]], ...],
) -> tuple[Predicate[T], ...]:
    if (
        len(components) == 1
        and components[0] is not None
        and not callable(components[0])
    ):
        flattened: Iterable[Predicate[T] | None] = components[0]
    else:
        flattened = components  # type: ignore[assignment]
    return tuple(
        require_non_null(component, "predicate component") for component in flattened
    )


def and_[T](*components: Predicate[T] | Iterable[Predicate[T]]) -> Predicate[T]:
    """Return a predicate true when every component is true.

    Accepts predicates as arguments or a single iterable of predicates.
    Evaluation stops at the first false component; no components means true.
    """
    return _AndPredicate(_defensive_copy(components))


def or_[T](*components: Predicate[T] | Iterable[Predicate[T]]) -> Predicate[T]:
    """Return a predicate true when any component is true.

    Evaluation stops at the first true component; no components means false.
    """
    return _OrPredicate(_defensive_copy(components))


def equal_to[T](target: T | None) -> Predicate[T | None]:
    if target is None:
        return is_none()
    return lambda value: value == target


def instance_of(cls: type | tuple[type, ...]) -> Predicate[object]:
    return lambda value: isinstance(value, cls)


def subclass_of(cls: type) -> Predicate[type]:
    """Return a predicate true for classes assignable to ``cls``."""
    return lambda candidate: issubclass(candidate, cls)


def in_[T](target: Collection[T]) -> Predicate[T]:
    """Return a membership predicate over ``target``.

    Probes the collection cannot compare (for example unhashable values
    against a set) count as absent.
    """
    require_non_null(target, "in_ collection")

    def contained(value: T) -> bool:
        try:
            return value in target
        except TypeError:
            return False

    return contained


def compose[A, B](predicate: Predicate[B], function: Callable[[A], B]) -> Predicate[A]:
    """Return ``predicate(function(value))``."""
    return lambda value: predicate(function(value))


def contains_pattern(pattern: str) -> Predicate[str]:
    return contains(re.compile(pattern))


def contains(pattern: re.Pattern[str]) -> Predicate[str]:
    """Return a predicate true when ``pattern`` matches anywhere in the text."""
    return lambda text: pattern.search(text) is not None


__all__ = [
    "Predicate",
    "always_false",
    "always_true",
    "and_",
    "compose",
    "contains",
    "contains_pattern",
    "equal_to",
    "in_",
    "instance_of",
    "is_none",
    "not_",
    "not_none",
    "or_",
    "subclass_of",
]
