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

"""Mutable single-value cells.

A box is a named mutable location: it can be read, written, modified in
place, and viewed through a converter. Boxes come in a few flavours:

- :class:`Box`: never holds ``None``. Writing ``None`` raises
  :class:`~funkit.errors.NullValueError`.
- :class:`NullableBox`: ``None`` is a regular value, including initially.
- :class:`IntBox`, :class:`LongBox`, :class:`DoubleBox`: numeric boxes whose
  primitive accessors (``get_as_int``/``set_int`` and friends) do the work;
  the generic ``get``/``set`` forward to them.

Each flavour offers field-backed storage (``of``) and a view over
caller-supplied accessors (``from_functions``). ``Box`` and ``NullableBox``
also offer a lock-guarded variant (``of_volatile``) whose writes are visible
to every later read from any thread; the numeric boxes raise
:class:`~funkit.errors.UnsupportedOperationError` there.

Mapped views
------------
``box.map(converter)`` returns a live view. Reads convert the delegate's
current value forward, writes revert before delegating, and ``modify`` calls
the delegate's ``modify`` exactly once::

    celsius = Box.of(20.0)
    fahrenheit = celsius.map(
        Converter.from_functions(lambda c: c * 9 / 5 + 32, lambda f: (f - 32) * 5 / 9, "c_to_f")
    )
    fahrenheit.get()                  # 68.0
    fahrenheit.modify(lambda f: f + 9)  # 77.0, celsius now holds 25.0

Thread safety
-------------
``modify`` is read-compute-write and is never atomic, not even on volatile
boxes: two concurrent calls may lose an update. A mapped view is exactly as
atomic as its delegate's ``modify``. Callers that need atomic updates hold
their own lock around the call. Boxes from ``of`` have no cross-thread
visibility guarantee and should stay confined to one thread.
"""

from __future__ import annotations

import operator
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Never, SupportsFloat, SupportsIndex, override

from ._guards import require_non_null
from .dbc import ContractResult, invariant
from .errors import ContractViolationError, UnsupportedOperationError

if TYPE_CHECKING:
    from .converter import Converter
    from .converter_nullable import ConverterNullable

_INT_BITS = 32
_LONG_BITS = 64


def _holds_value(box: DefaultBox[object] | VolatileBox[object]) -> ContractResult:
    return (box._value is not None, "non-null box holds None")  # pyright: ignore[reportPrivateUsage]


class Box[T](ABC):
    """Mutable cell that never holds ``None``."""

    __slots__ = ()

    @staticmethod
    def of[V](value: V) -> Box[V]:
        """Return a field-backed box confined to a single thread."""
        return DefaultBox(value)

    @staticmethod
    def of_volatile[V](value: V) -> Box[V]:
        """Return a box whose writes are visible to all threads."""
        return VolatileBox(value)

    @staticmethod
    def from_functions[V](
        getter: Callable[[], V | None], setter: Callable[[V], object]
    ) -> Box[V]:
        """Return a box over external accessors.

        Both the value read from ``getter`` and the value handed to ``setter``
        are checked for ``None``.
        """
        return _FunctionBox(
            require_non_null(getter, "Box.from_functions getter"),
            require_non_null(setter, "Box.from_functions setter"),
        )

    @abstractmethod
    def get(self) -> T:
        """Return the current value."""

    @abstractmethod
    def set(self, value: T) -> None:
        """Store ``value``.

        Raises:
            NullValueError: If value is None.
        """

    def __call__(self) -> T:
        return self.get()

    def accept(self, value: T) -> None:
        """Consumer-style alias of :meth:`set`."""
        self.set(value)

    def modify(self, mutator: Callable[[T], T]) -> T:
        """Replace the value with ``mutator(current)`` and return the new value.

        Not atomic: the read and the write are separate steps.
        """
        modified = mutator(self.get())
        self.set(modified)
        return modified

    def map[R](self, converter: Converter[T, R]) -> Box[R]:
        """Return a live view of this box through ``converter``."""
        return MappedBox(self, require_non_null(converter, "Box.map converter"))


@invariant(_holds_value)
class DefaultBox[T](Box[T]):
    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value: T = require_non_null(value, "Box initial value")

    @override
    def get(self) -> T:
        return self._value

    @override
    def set(self, value: T) -> None:
        self._value = require_non_null(value, "Box.set")

    @override
    def __repr__(self) -> str:
        return f"Box.of[{self.get()}]"


@invariant(_holds_value)
class VolatileBox[T](Box[T]):
    __slots__ = ("_lock", "_value")

    def __init__(self, value: T) -> None:
        self._lock = threading.Lock()
        self._value: T = require_non_null(value, "Box initial value")

    @override
    def get(self) -> T:
        with self._lock:
            return self._value

    @override
    def set(self, value: T) -> None:
        checked = require_non_null(value, "Box.set")
        with self._lock:
            self._value = checked

    @override
    def __repr__(self) -> str:
        return f"Box.of_volatile[{self.get()}]"


class _FunctionBox[T](Box[T]):
    __slots__ = ("_getter", "_setter")

    def __init__(
        self, getter: Callable[[], T | None], setter: Callable[[T], object]
    ) -> None:
        self._getter = getter
        self._setter = setter

    @override
    def get(self) -> T:
        return require_non_null(self._getter(), "Box.from_functions getter result")

    @override
    def set(self, value: T) -> None:
        self._setter(require_non_null(value, "Box.set"))

    @override
    def __repr__(self) -> str:
        return f"Box.from[{self.get()}]"


class MappedBox[T, R](Box[R]):
    """View of a delegate box through a converter."""

    __slots__ = ("_converter", "_delegate")

    def __init__(self, delegate: Box[T], converter: Converter[T, R]) -> None:
        self._delegate = delegate
        self._converter = converter

    @override
    def get(self) -> R:
        return self._converter.convert_non_null(self._delegate.get())

    @override
    def set(self, value: R) -> None:
        self._delegate.set(self._converter.revert_non_null(value))

    @override
    def modify(self, mutator: Callable[[R], R]) -> R:
        result: NullableBox[R] = NullableBox.of_none()

        def unmapped(current: T) -> T:
            mapped = mutator(self._converter.convert_non_null(current))
            result.set(mapped)
            return self._converter.revert_non_null(mapped)

        self._delegate.modify(unmapped)
        return require_non_null(result.get(), "Box.modify result")

    @override
    def __repr__(self) -> str:
        return f"[{self._delegate} mapped to {self.get()} by {self._converter}]"


class NullableBox[T](ABC):
    """Mutable cell where ``None`` is an ordinary value."""

    __slots__ = ()

    @staticmethod
    def of[V](value: V | None) -> NullableBox[V]:
        return _DefaultNullableBox(value)

    @staticmethod
    def of_none[V]() -> NullableBox[V]:
        return _DefaultNullableBox(None)

    @staticmethod
    def of_volatile[V](value: V | None) -> NullableBox[V]:
        return _VolatileNullableBox(value)

    @staticmethod
    def of_volatile_none[V]() -> NullableBox[V]:
        return _VolatileNullableBox(None)

    @staticmethod
    def from_functions[V](
        getter: Callable[[], V | None], setter: Callable[[V | None], object]
    ) -> NullableBox[V]:
        return _FunctionNullableBox(
            require_non_null(getter, "NullableBox.from_functions getter"),
            require_non_null(setter, "NullableBox.from_functions setter"),
        )

    @abstractmethod
    def get(self) -> T | None: ...

    @abstractmethod
    def set(self, value: T | None) -> None: ...

    def __call__(self) -> T | None:
        return self.get()

    def accept(self, value: T | None) -> None:
        self.set(value)

    def modify(self, mutator: Callable[[T | None], T | None]) -> T | None:
        modified = mutator(self.get())
        self.set(modified)
        return modified

    def map[R](self, converter: ConverterNullable[T, R]) -> NullableBox[R]:
        """Return a live view through ``converter``; ``None`` is not special-cased."""
        return _MappedNullableBox(
            self, require_non_null(converter, "NullableBox.map converter")
        )


class _DefaultNullableBox[T](NullableBox[T]):
    __slots__ = ("_value",)

    def __init__(self, value: T | None) -> None:
        self._value = value

    @override
    def get(self) -> T | None:
        return self._value

    @override
    def set(self, value: T | None) -> None:
        self._value = value

    @override
    def __repr__(self) -> str:
        return f"Box.Nullable.of[{self.get()}]"


class _VolatileNullableBox[T](NullableBox[T]):
    __slots__ = ("_lock", "_value")

    def __init__(self, value: T | None) -> None:
        self._lock = threading.Lock()
        self._value = value

    @override
    def get(self) -> T | None:
        with self._lock:
            return self._value

    @override
    def set(self, value: T | None) -> None:
        with self._lock:
            self._value = value

    @override
    def __repr__(self) -> str:
        return f"Box.Nullable.of_volatile[{self.get()}]"


class _FunctionNullableBox[T](NullableBox[T]):
    __slots__ = ("_getter", "_setter")

    def __init__(
        self, getter: Callable[[], T | None], setter: Callable[[T | None], object]
    ) -> None:
        self._getter = getter
        self._setter = setter

    @override
    def get(self) -> T | None:
        return self._getter()

    @override
    def set(self, value: T | None) -> None:
        self._setter(value)

    @override
    def __repr__(self) -> str:
        return f"Box.Nullable.from[{self.get()}]"


class _MappedNullableBox[T, R](NullableBox[R]):
    __slots__ = ("_converter", "_delegate")

    def __init__(
        self, delegate: NullableBox[T], converter: ConverterNullable[T, R]
    ) -> None:
        self._delegate = delegate
        self._converter = converter

    @override
    def get(self) -> R | None:
        return self._converter.convert(self._delegate.get())

    @override
    def set(self, value: R | None) -> None:
        self._delegate.set(self._converter.revert(value))

    @override
    def modify(self, mutator: Callable[[R | None], R | None]) -> R | None:
        result: NullableBox[R] = NullableBox.of_none()

        def unmapped(current: T | None) -> T | None:
            mapped = mutator(self._converter.convert(current))
            result.set(mapped)
            return self._converter.revert(mapped)

        self._delegate.modify(unmapped)
        return result.get()

    @override
    def __repr__(self) -> str:
        return f"[{self._delegate} mapped to {self.get()} by {self._converter}]"


def _checked_integer(value: SupportsIndex | None, bits: int, context: str) -> int:
    number = operator.index(require_non_null(value, context))
    bound = 1 << (bits - 1)
    if not -bound <= number < bound:
        msg = f"{context}: {number} does not fit in a signed {bits}-bit integer"
        raise ContractViolationError(msg)
    return number


def _checked_float(value: SupportsFloat | None, context: str) -> float:
    return float(require_non_null(value, context))


class IntBox(Box[int]):
    """Box over a signed 32-bit integer."""

    __slots__ = ()

    @staticmethod
    @override
    def of(value: SupportsIndex) -> IntBox:  # pyright: ignore[reportIncompatibleMethodOverride]
        return _DefaultIntBox(value)

    @staticmethod
    @override
    def of_volatile(value: object) -> Never:  # pyright: ignore[reportIncompatibleMethodOverride]
        """Not available: guard an ``IntBox.of`` box with your own lock."""
        del value
        msg = "IntBox has no volatile variant"
        raise UnsupportedOperationError(msg)

    @staticmethod
    @override
    def from_functions(  # pyright: ignore[reportIncompatibleMethodOverride]
        getter: Callable[[], int], setter: Callable[[int], object]
    ) -> IntBox:
        return _FunctionIntBox(
            require_non_null(getter, "IntBox.from_functions getter"),
            require_non_null(setter, "IntBox.from_functions setter"),
        )

    @abstractmethod
    def get_as_int(self) -> int: ...

    @abstractmethod
    def set_int(self, value: SupportsIndex) -> None: ...

    @override
    def get(self) -> int:
        return self.get_as_int()

    @override
    def set(self, value: int) -> None:
        self.set_int(value)


class _DefaultIntBox(IntBox):
    __slots__ = ("_value",)

    def __init__(self, value: SupportsIndex) -> None:
        self._value = _checked_integer(value, _INT_BITS, "IntBox initial value")

    @override
    def get_as_int(self) -> int:
        return self._value

    @override
    def set_int(self, value: SupportsIndex) -> None:
        self._value = _checked_integer(value, _INT_BITS, "IntBox.set")

    @override
    def __repr__(self) -> str:
        return f"Box.Int.of[{self.get_as_int()}]"


class _FunctionIntBox(IntBox):
    __slots__ = ("_getter", "_setter")

    def __init__(self, getter: Callable[[], int], setter: Callable[[int], object]) -> None:
        self._getter = getter
        self._setter = setter

    @override
    def get_as_int(self) -> int:
        return _checked_integer(self._getter(), _INT_BITS, "IntBox getter result")

    @override
    def set_int(self, value: SupportsIndex) -> None:
        self._setter(_checked_integer(value, _INT_BITS, "IntBox.set"))

    @override
    def __repr__(self) -> str:
        return f"Box.Int.from[{self.get_as_int()}]"


class LongBox(Box[int]):
    """Box over a signed 64-bit integer."""

    __slots__ = ()

    @staticmethod
    @override
    def of(value: SupportsIndex) -> LongBox:  # pyright: ignore[reportIncompatibleMethodOverride]
        return _DefaultLongBox(value)

    @staticmethod
    @override
    def of_volatile(value: object) -> Never:  # pyright: ignore[reportIncompatibleMethodOverride]
        del value
        msg = "LongBox has no volatile variant"
        raise UnsupportedOperationError(msg)

    @staticmethod
    @override
    def from_functions(  # pyright: ignore[reportIncompatibleMethodOverride]
        getter: Callable[[], int], setter: Callable[[int], object]
    ) -> LongBox:
        return _FunctionLongBox(
            require_non_null(getter, "LongBox.from_functions getter"),
            require_non_null(setter, "LongBox.from_functions setter"),
        )

    @abstractmethod
    def get_as_long(self) -> int: ...

    @abstractmethod
    def set_long(self, value: SupportsIndex) -> None: ...

    @override
    def get(self) -> int:
        return self.get_as_long()

    @override
    def set(self, value: int) -> None:
        self.set_long(value)


class _DefaultLongBox(LongBox):
    __slots__ = ("_value",)

    def __init__(self, value: SupportsIndex) -> None:
        self._value = _checked_integer(value, _LONG_BITS, "LongBox initial value")

    @override
    def get_as_long(self) -> int:
        return self._value

    @override
    def set_long(self, value: SupportsIndex) -> None:
        self._value = _checked_integer(value, _LONG_BITS, "LongBox.set")

    @override
    def __repr__(self) -> str:
        return f"Box.Long.of[{self.get_as_long()}]"


class _FunctionLongBox(LongBox):
    __slots__ = ("_getter", "_setter")

    def __init__(self, getter: Callable[[], int], setter: Callable[[int], object]) -> None:
        self._getter = getter
        self._setter = setter

    @override
    def get_as_long(self) -> int:
        return _checked_integer(self._getter(), _LONG_BITS, "LongBox getter result")

    @override
    def set_long(self, value: SupportsIndex) -> None:
        self._setter(_checked_integer(value, _LONG_BITS, "LongBox.set"))

    @override
    def __repr__(self) -> str:
        return f"Box.Long.from[{self.get_as_long()}]"


class DoubleBox(Box[float]):
    """Box over a float."""

    __slots__ = ()

    @staticmethod
    @override
    def of(value: SupportsFloat) -> DoubleBox:  # pyright: ignore[reportIncompatibleMethodOverride]
        return _DefaultDoubleBox(value)

    @staticmethod
    @override
    def of_volatile(value: object) -> Never:  # pyright: ignore[reportIncompatibleMethodOverride]
        del value
        msg = "DoubleBox has no volatile variant"
        raise UnsupportedOperationError(msg)

    @staticmethod
    @override
    def from_functions(  # pyright: ignore[reportIncompatibleMethodOverride]
        getter: Callable[[], float], setter: Callable[[float], object]
    ) -> DoubleBox:
        return _FunctionDoubleBox(
            require_non_null(getter, "DoubleBox.from_functions getter"),
            require_non_null(setter, "DoubleBox.from_functions setter"),
        )

    @abstractmethod
    def get_as_float(self) -> float: ...

    @abstractmethod
    def set_float(self, value: SupportsFloat) -> None: ...

    @override
    def get(self) -> float:
        return self.get_as_float()

    @override
    def set(self, value: float) -> None:
        self.set_float(value)


class _DefaultDoubleBox(DoubleBox):
    __slots__ = ("_value",)

    def __init__(self, value: SupportsFloat) -> None:
        self._value = _checked_float(value, "DoubleBox initial value")

    @override
    def get_as_float(self) -> float:
        return self._value

    @override
    def set_float(self, value: SupportsFloat) -> None:
        self._value = _checked_float(value, "DoubleBox.set")

    @override
    def __repr__(self) -> str:
        return f"Box.Dbl.of[{self.get_as_float()}]"


class _FunctionDoubleBox(DoubleBox):
    __slots__ = ("_getter", "_setter")

    def __init__(
        self, getter: Callable[[], float], setter: Callable[[float], object]
    ) -> None:
        self._getter = getter
        self._setter = setter

    @override
    def get_as_float(self) -> float:
        return _checked_float(self._getter(), "DoubleBox getter result")

    @override
    def set_float(self, value: SupportsFloat) -> None:
        self._setter(_checked_float(value, "DoubleBox.set"))

    @override
    def __repr__(self) -> str:
        return f"Box.Dbl.from[{self.get_as_float()}]"


__all__ = [
    "Box",
    "DefaultBox",
    "DoubleBox",
    "IntBox",
    "LongBox",
    "MappedBox",
    "NullableBox",
    "VolatileBox",
]
