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

"""Smoke tests for the public package surface."""

from __future__ import annotations

import funkit


def test_public_exports_resolve() -> None:
    for name in funkit.__all__:
        assert getattr(funkit, name) is not None


def test_top_level_helpers_are_the_module_functions() -> None:
    assert funkit.memoize is funkit.suppliers.memoize
    assert funkit.memoize_with_expiration is funkit.suppliers.memoize_with_expiration
