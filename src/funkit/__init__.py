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

"""Small functional building blocks.

- :class:`Converter` / :class:`ConverterNullable`: invertible, composable
  conversions
- :class:`Box` and friends: mutable cells that can be viewed through converters
- :class:`Either`: two-armed disjoint union
- :mod:`funkit.suppliers`: memoizing zero-argument computations
- :mod:`funkit.predicates`, :mod:`funkit.consumers`: callable combinators
"""

from __future__ import annotations

from . import consumers, predicates, suppliers
from .box import Box, DoubleBox, IntBox, LongBox, NullableBox
from .comparison import Comparison
from .converter import Converter
from .converter_nullable import ConverterNullable
from .either import Either, Left, Right
from .errors import (
    ContractViolationError,
    FunkitError,
    NullValueError,
    Unhandled,
    UnsupportedOperationError,
)
from .suppliers import memoize, memoize_with_expiration

__all__ = [
    "Box",
    "Comparison",
    "ContractViolationError",
    "Converter",
    "ConverterNullable",
    "DoubleBox",
    "Either",
    "FunkitError",
    "IntBox",
    "Left",
    "LongBox",
    "NullValueError",
    "NullableBox",
    "Right",
    "Unhandled",
    "UnsupportedOperationError",
    "consumers",
    "memoize",
    "memoize_with_expiration",
    "predicates",
    "suppliers",
]
