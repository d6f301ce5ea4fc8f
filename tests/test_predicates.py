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

"""Tests for :mod:`funkit.predicates`."""

from __future__ import annotations

import re

import pytest
from hypothesis import given, strategies as st

from funkit.errors import NullValueError
from funkit.predicates import (
    Predicate,
    always_false,
    always_true,
    and_,
    compose,
    contains,
    contains_pattern,
    equal_to,
    in_,
    instance_of,
    is_none,
    not_,
    not_none,
    or_,
    subclass_of,
)


def _is_even(value: int) -> bool:
    return value % 2 == 0


def _is_small(value: int) -> bool:
    return value < 10


class TestConstants:
    def test_always(self) -> None:
        assert always_true()(None) is True
        assert always_false()("x") is False

    def test_none_checks(self) -> None:
        assert is_none()(None) is True
        assert is_none()(0) is False
        assert not_none()(0) is True
        assert not_none()(None) is False


class TestCombinators:
    def test_not(self) -> None:
        assert not_(_is_even)(3) is True
        assert not_(_is_even)(4) is False

    def test_and_varargs(self) -> None:
        predicate = and_(_is_even, _is_small)

        assert predicate(4) is True
        assert predicate(12) is False
        assert predicate(3) is False

    def test_and_iterable(self) -> None:
        assert and_([_is_even, _is_small])(4) is True

    def test_empty_and_or(self) -> None:
        assert and_()(1) is True
        assert or_()(1) is False
        assert or_([])(1) is False

    def test_or(self) -> None:
        predicate = or_(_is_even, _is_small)

        assert predicate(3) is True
        assert predicate(12) is True
        assert predicate(13) is False

    def test_short_circuits(self) -> None:
        calls: list[str] = []

        def record(name: str, result: bool) -> Predicate[int]:
            def predicate(_: int) -> bool:
                calls.append(name)
                return result

            return predicate

        and_(record("a", False), record("b", True))(0)
        or_(record("c", True), record("d", False))(0)

        assert calls == ["a", "c"]

    def test_components_are_copied(self) -> None:
        components: list[Predicate[int]] = [_is_even]
        predicate = and_(components)

        components.append(always_false())

        assert predicate(2) is True

    def test_none_component_rejected(self) -> None:
        with pytest.raises(NullValueError):
            and_(_is_even, None)  # type: ignore[arg-type]
        with pytest.raises(NullValueError):
            or_(None)  # type: ignore[arg-type]

    def test_str(self) -> None:
        assert str(and_(_is_even)).startswith("and_(")
        assert str(or_()) == "or_()"


class TestValuePredicates:
    def test_equal_to(self) -> None:
        assert equal_to(3)(3) is True
        assert equal_to(3)(4) is False
        assert equal_to(None)(None) is True
        assert equal_to(None)(0) is False

    def test_instance_of(self) -> None:
        assert instance_of(int)(True) is True
        assert instance_of((str, bytes))(b"x") is True
        assert instance_of(str)(1) is False

    def test_subclass_of(self) -> None:
        assert subclass_of(Exception)(ValueError) is True
        assert subclass_of(ValueError)(Exception) is False

    def test_in(self) -> None:
        allowed = in_({1, 2})

        assert allowed(1) is True
        assert allowed(3) is False

    def test_in_treats_incomparable_values_as_absent(self) -> None:
        assert in_({1, 2})([1]) is False  # type: ignore[arg-type]

    def test_compose(self) -> None:
        has_short_name = compose(_is_small, len)

        assert has_short_name("abc") is True
        assert has_short_name("a" * 20) is False

    def test_contains_pattern(self) -> None:
        predicate = contains_pattern(r"\d+")

        assert predicate("abc123") is True
        assert predicate("abc") is False

    def test_contains_compiled(self) -> None:
        assert contains(re.compile("^x"))("xyz") is True
        assert contains(re.compile("^x"))("yxz") is False


@given(st.integers(), st.booleans(), st.booleans())
def test_and_or_match_boolean_logic(value: int, first: bool, second: bool) -> None:
    p: Predicate[int] = always_true() if first else always_false()
    q: Predicate[int] = always_true() if second else always_false()

    assert and_(p, q)(value) is (first and second)
    assert or_(p, q)(value) is (first or second)
    assert not_(and_(p, q))(value) is or_(not_(p), not_(q))(value)
