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

"""Tests for :class:`funkit.comparison.Comparison`."""

from __future__ import annotations

import math

import pytest
from hypothesis import given, strategies as st

from funkit.comparison import Comparison
from funkit.errors import Unhandled


class TestFromInt:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (-7, Comparison.LESSER),
            (0, Comparison.EQUAL),
            (3, Comparison.GREATER),
            (-0.5, Comparison.LESSER),
            (0.0, Comparison.EQUAL),
        ],
    )
    def test_maps_sign(self, value: float, expected: Comparison) -> None:
        assert Comparison.from_int(value) is expected

    def test_nan_is_unhandled(self) -> None:
        with pytest.raises(Unhandled, match="nan"):
            Comparison.from_int(math.nan)


class TestCompare:
    def test_natural_ordering(self) -> None:
        assert Comparison.compare(1, 2) is Comparison.LESSER
        assert Comparison.compare("b", "a") is Comparison.GREATER
        assert Comparison.compare(4, 4) is Comparison.EQUAL

    def test_key(self) -> None:
        assert Comparison.compare("aaa", "b", key=len) is Comparison.GREATER

    def test_compare_with_comparator(self) -> None:
        def by_length(a: str, b: str) -> int:
            return len(a) - len(b)

        assert Comparison.compare_with(by_length, "xy", "ab") is Comparison.EQUAL
        assert Comparison.compare_with(by_length, "x", "ab") is Comparison.LESSER


class TestLesserEqualGreater:
    def test_selects_matching_argument(self) -> None:
        choices = ("lt", "eq", "gt")

        assert Comparison.LESSER.lesser_equal_greater(*choices) == "lt"
        assert Comparison.EQUAL.lesser_equal_greater(*choices) == "eq"
        assert Comparison.GREATER.lesser_equal_greater(*choices) == "gt"


@given(st.integers(), st.integers())
def test_compare_is_antisymmetric(a: int, b: int) -> None:
    forward = Comparison.compare(a, b)
    backward = Comparison.compare(b, a)

    assert forward.lesser_equal_greater(
        Comparison.GREATER, Comparison.EQUAL, Comparison.LESSER
    ) is backward
