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

"""Tests for the exception hierarchy and the non-null guard."""

from __future__ import annotations

from enum import Enum

import pytest

from funkit._guards import require_non_null
from funkit.errors import (
    ContractViolationError,
    FunkitError,
    NullValueError,
    Unhandled,
    UnsupportedOperationError,
)


class _Colour(Enum):
    RED = 1


class TestHierarchy:
    """Library errors keep their stdlib bases."""

    def test_contract_violation_is_value_error(self) -> None:
        assert issubclass(ContractViolationError, FunkitError)
        assert issubclass(ContractViolationError, ValueError)

    def test_null_value_is_contract_violation(self) -> None:
        assert issubclass(NullValueError, ContractViolationError)

    def test_unsupported_operation_is_runtime_error(self) -> None:
        assert issubclass(UnsupportedOperationError, FunkitError)
        assert issubclass(UnsupportedOperationError, RuntimeError)

    def test_unhandled_is_assertion_error(self) -> None:
        assert issubclass(Unhandled, AssertionError)


class TestUnhandled:
    """Factory messages describe the value that fell through."""

    def test_for_int(self) -> None:
        assert str(Unhandled.for_int(5)) == "Unhandled integer '5'"

    def test_for_float(self) -> None:
        assert str(Unhandled.for_float(1.5)) == "Unhandled float '1.5'"

    def test_for_string(self) -> None:
        assert str(Unhandled.for_string("x")) == "Unhandled string 'x'"

    def test_for_object(self) -> None:
        assert str(Unhandled.for_object([1])) == "Unhandled object '[1]'"

    def test_for_enum(self) -> None:
        error = Unhandled.for_enum(_Colour.RED)

        assert str(error) == "Unhandled enum value 'RED' for enum class '_Colour'"

    def test_for_enum_none(self) -> None:
        assert str(Unhandled.for_enum(None)) == "Unhandled enum value 'None'"

    def test_for_class_uses_qualified_name(self) -> None:
        assert str(Unhandled.for_class(3)) == "Unhandled class 'builtins.int'"
        assert str(Unhandled.for_class(int)) == "Unhandled class 'builtins.int'"

    def test_for_class_none(self) -> None:
        assert str(Unhandled.for_class(None)) == "Unhandled class 'None'"

    def test_factories_return_raisable_instances(self) -> None:
        with pytest.raises(Unhandled, match="integer '7'"):
            raise Unhandled.for_int(7)


class TestRequireNonNull:
    def test_returns_value(self) -> None:
        sentinel = object()

        assert require_non_null(sentinel) is sentinel

    def test_falsy_values_pass(self) -> None:
        assert require_non_null(0) == 0
        assert require_non_null("") == ""

    def test_none_raises_with_context(self) -> None:
        with pytest.raises(NullValueError, match="^Box.set: Expected non-None value$"):
            require_non_null(None, "Box.set")

    def test_none_without_context(self) -> None:
        with pytest.raises(NullValueError, match="^Expected non-None value$"):
            require_non_null(None)
