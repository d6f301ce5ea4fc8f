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

"""Combinators for single-argument callables whose result is ignored."""

from __future__ import annotations

from collections.abc import Callable

type Consumer[T] = Callable[[T], object]


def do_nothing[T]() -> Consumer[T]:
    """Return a consumer that ignores its argument."""

    def ignore(value: T) -> None:
        del value

    return ignore


def compose[T, R](function: Callable[[T], R], consumer: Consumer[R]) -> Consumer[T]:
    """Return a consumer passing ``function(value)`` on to ``consumer``."""

    def composed(value: T) -> None:
        consumer(function(value))

    return composed


def redirectable[T](target: Callable[[], Consumer[T]]) -> Consumer[T]:
    """Return a consumer that resolves its target on every call.

    ``target`` is asked for the current consumer each time a value arrives,
    so the destination can be swapped at runtime, e.g. through a
    :class:`~funkit.box.Box` holding the consumer.
    """

    def redirect(value: T) -> None:
        target()(value)

    return redirect


__all__ = ["Consumer", "compose", "do_nothing", "redirectable"]
