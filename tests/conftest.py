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

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, settings

import funkit.dbc as dbc_module
from funkit.clock import FakeClock

# The autouse fixtures below only reset module state between examples.
settings.register_profile(
    "funkit", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("funkit")


@pytest.fixture(autouse=True)
def reset_dbc_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test with DbC off unless the test turns it on."""

    monkeypatch.delenv("FUNKIT_DBC", raising=False)
    dbc_module._forced_state = None
    yield
    dbc_module._forced_state = None


@pytest.fixture
def fake_clock() -> FakeClock:
    """Provide a fresh FakeClock starting at zero."""

    return FakeClock()
