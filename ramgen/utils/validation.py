#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Validation helpers with rich error reporting.

Validation Utilities
====================

Configuration values are checked at construction time so that a bad
FeatureSet never reaches the parameter deriver. Every helper raises
``ConfigurationError`` with the field name, the offending value and the
legal range in its context.

Consistency checks (``assert_equals``) raise ``ConsistencyError`` instead,
since a mismatch there is a generator bug rather than bad user input.

Example:
    >>> try:
    ...     check_in_range(7, 1, 5, "pipeline_stages")
    ... except ConfigurationError as e:
    ...     print(e.context["max"])  # 5
"""

from enum import Enum
from typing import Any, TypeVar

from ramgen.exceptions import ConfigurationError, ConsistencyError

E = TypeVar("E", bound=Enum)


def check_int(value: Any, name: str) -> int:
    """Reject non-integers (including bools, which are ints in Python)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{name} must be an integer",
            value=repr(value),
            type=type(value).__name__,
        )
    return value


def check_in_range(value: Any, min_val: int, max_val: int, name: str) -> int:
    """Check that an integer lies in the closed range [min_val, max_val].

    Returns:
        The value, unchanged
    """
    check_int(value, name)
    if not min_val <= value <= max_val:
        raise ConfigurationError(
            f"{name} out of range",
            value=value,
            min=min_val,
            max=max_val,
        )
    return value


def check_power_of_two(value: Any, name: str, minimum: int = 1) -> int:
    """Check that an integer is a power of two no smaller than ``minimum``."""
    check_int(value, name)
    if value < minimum or value & (value - 1):
        raise ConfigurationError(
            f"{name} must be a power of two >= {minimum}",
            value=value,
        )
    return value


def check_bool(value: Any, name: str) -> bool:
    """Check that a toggle is a real bool, not a truthy stand-in."""
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"{name} must be a bool", value=repr(value), type=type(value).__name__
        )
    return value


def coerce_enum(value: Any, enum_cls: type[E], name: str) -> E:
    """Accept an enum member or its string value.

    Args:
        value: Enum member or raw value (e.g. "axi4")
        enum_cls: Target enum class
        name: Field name for error messages

    Returns:
        The matching enum member

    Raises:
        ConfigurationError: If the value names no member
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ConfigurationError(
            f"Invalid {name}",
            value=repr(value),
            valid_values=[member.value for member in enum_cls],
        ) from None


def assert_equals(
    actual: Any, expected: Any, parameter: str, message: str = "", **context: Any
) -> None:
    """Assert a generated value equals its derived value."""
    if actual != expected:
        raise ConsistencyError(
            message or f"{parameter} mismatch: expected {expected}, got {actual}",
            parameter=parameter,
            expected_value=expected,
            actual_value=actual,
            **context,
        )
