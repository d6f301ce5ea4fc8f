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

"""Non-null guards shared by the non-nullable types.

Unlike ``typing.cast``, these helpers verify at runtime that a value is
present and narrow ``T | None`` to ``T`` for the type checker::

    from funkit._guards import require_non_null

    value = require_non_null(getter(), "Box.from_functions getter")
"""

from __future__ import annotations

from .errors import NullValueError


def require_non_null[T](value: T | None, context: str = "") -> T:
    """Return ``value`` unchanged when it is not ``None``.

    Args:
        value: The potentially-None value.
        context: Description of the contract being checked, included in the
            error message.

    Returns:
        The value, with None removed from its type.

    Raises:
        NullValueError: If value is None.
    """
    if value is None:
        msg = "Expected non-None value"
        if context:
            msg = f"{context}: {msg}"
        raise NullValueError(msg)
    return value


__all__ = ["require_non_null"]
