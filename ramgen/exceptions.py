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

"""Custom exceptions for configuration and generation errors.

Exceptions
==========

This module defines the exception hierarchy used by the generator. Each
exception carries a ``context`` dict that is also rendered into the message,
so a failure names the offending field and value without extra logging.

Simulator boundary violations are *not* exceptions: they are reported
through the simulator log and a failed result.
"""

from typing import Any


class RamGenError(Exception):
    """Base exception for all generator failures.

    Attributes:
        context: Structured details about the failure (field, value, ...)
    """

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize with message and optional context.

        Args:
            message: Error description
            **context: Key/value details appended to the message
        """
        self.context = context
        context_str = "\n".join(f"  {k}: {v}" for k, v in context.items())
        super().__init__(f"{message}\nContext:\n{context_str}" if context else message)


class ConfigurationError(RamGenError, ValueError):
    """Invalid configuration.

    Raised when a FeatureSet, geometry or interface profile is constructed
    with values outside their legal ranges (e.g. pipeline_stages=7), so that
    nonsensical parameters are never derived.
    """

    pass


class ConsistencyError(RamGenError):
    """Generated text disagrees with the derived parameters.

    This indicates a broken invariant in a generator, not a recoverable
    runtime condition.
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        expected_value: int | None = None,
        actual_value: int | None = None,
        **context: Any,
    ) -> None:
        """Initialize consistency error with comparison context.

        Args:
            message: Error description
            parameter: Name of the mismatched HDL parameter
            expected_value: Value from the derived parameters
            actual_value: Value found in the generated text
            **context: Additional details (artifact name, ...)
        """
        super().__init__(
            message,
            parameter=parameter,
            expected=expected_value,
            actual=actual_value,
            **context,
        )
        self.parameter = parameter
        self.expected_value = expected_value
        self.actual_value = actual_value


class GenerationError(RamGenError):
    """A template failed to render."""

    pass
