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

"""Structured log entries for the behavioral simulator.

Simulation Logger
=================

Formats the simulator's append-only log entries and mirrors each one to the
``ramgen.simulator`` logger. The returned strings are the contract consumed
by callers: any entry containing ``LOG_ERROR_TOKEN`` marks a failed run, and
uninitialized reads carry ``LOG_UNINITIALIZED_MARKER`` instead of a value.
"""

import logging

from ramgen.config import (
    LOG_ERROR_TOKEN,
    LOG_FAIL_MARK,
    LOG_PASS_MARK,
    LOG_UNINITIALIZED_MARKER,
    LOG_WARN_MARK,
)
from ramgen.utils.memory_utils import format_hex

log = logging.getLogger("ramgen.simulator")


class SimulationLogger:
    """Formatting helpers for simulator log entries.

    Every method returns the entry text after emitting it at a matching
    level (info for successes, warning for uninitialized reads, error for
    boundary violations and mismatches).
    """

    @staticmethod
    def log_write(address: int, value: int) -> str:
        """Successful write entry.

        Args:
            address: Word address written
            value: Stored value (already masked to data width)
        """
        entry = f"{LOG_PASS_MARK} WRITE: addr={format_hex(address)} data={format_hex(value)}"
        log.info(entry)
        return entry

    @staticmethod
    def log_read(address: int, value: int | None) -> str:
        """Successful read entry, or an uninitialized marker.

        Args:
            address: Word address read
            value: Stored value, or None if the address was never written
        """
        if value is None:
            entry = (
                f"{LOG_WARN_MARK} READ: addr={format_hex(address)} "
                f"data={LOG_UNINITIALIZED_MARKER}"
            )
            log.warning(entry)
        else:
            entry = f"{LOG_PASS_MARK} READ: addr={format_hex(address)} data={format_hex(value)}"
            log.info(entry)
        return entry

    @staticmethod
    def log_boundary_violation(operation: str, address: int, depth: int) -> str:
        """Out-of-range access entry.

        Args:
            operation: "WRITE" or "READ"
            address: Offending address
            depth: Memory depth (exclusive upper bound)
        """
        entry = (
            f"{LOG_FAIL_MARK} {LOG_ERROR_TOKEN}: {operation} address {format_hex(address)} "
            f"out of range [0x0, {format_hex(depth)})"
        )
        log.error(entry)
        return entry

    @staticmethod
    def log_mismatch(address: int, expected: int, actual: int | None) -> str:
        """Read-back mismatch entry for the basic test."""
        actual_str = LOG_UNINITIALIZED_MARKER if actual is None else format_hex(actual)
        entry = (
            f"{LOG_FAIL_MARK} {LOG_ERROR_TOKEN}: READ mismatch at addr={format_hex(address)}: "
            f"expected {format_hex(expected)}, got {actual_str}"
        )
        log.error(entry)
        return entry

    @staticmethod
    def log_test_start(name: str, depth: int, data_width: int) -> str:
        entry = f"Starting {name} (depth={depth}, data width={data_width})"
        log.info(entry)
        return entry

    @staticmethod
    def log_test_summary(name: str, checks: int, failures: int) -> str:
        """Pass/fail summary line.

        Args:
            name: Test name
            checks: Number of read-back checks performed
            failures: Number of failed checks
        """
        if failures:
            entry = f"{LOG_FAIL_MARK} {name} failed: {failures} of {checks} checks"
            log.error(entry)
        else:
            entry = f"{LOG_PASS_MARK} {name} passed: {checks}/{checks} checks"
            log.info(entry)
        return entry
