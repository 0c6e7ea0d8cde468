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

"""Behavioral model of a generated RAM.

Memory Model
============

This module provides a minimal behavioral simulator used to sanity-check
read/write sequences against a configuration before (or instead of) running
generated RTL in a real simulator. It also serves as the reference model for
the cocotb tests in ``verif/``.

Key Features:
    - Word-addressable memory stored as a dict for sparse representation
    - Values masked to the configured data width on write
    - Boundary checking against [0, depth) with no partial mutation
    - Append-only textual log; an entry containing "ERROR" marks failure
    - Explicit instances (a new configuration gets a new simulator)

Usage:
    sim = MemorySimulator(RamGeometry.from_size_class("8GB"))
    sim.write(0x1000, 0xDEADBEEF)
    sim.read(0x1000)               # ReadResult(success=True, value=0xDEADBEEF)
    sim.read(0x2000)               # ReadResult(success=True, value=None)
    logs = sim.run_basic_test()
"""

from typing import NamedTuple

from ramgen.config import LOG_ERROR_TOKEN
from ramgen.configuration import MemorySizeClass, RamGeometry
from ramgen.ram_types import Address, DataWord
from ramgen.utils.memory_utils import (
    canonical_test_vectors,
    is_address_in_range,
    mask_to_width,
)
from ramgen.utils.sim_logger import SimulationLogger

BASIC_TEST_NAME = "Basic read/write test"


class ReadResult(NamedTuple):
    """Outcome of a simulator read.

    Attributes:
        success: False only for out-of-range addresses
        value: Stored value, or None if out of range or never written
    """

    success: bool
    value: int | None


class MemorySimulator:
    """Address-to-value store with boundary checking and an event log.

    Attributes:
        geometry: Geometry fixed at construction
        ram_words: Sparse word storage (address -> masked value)
    """

    def __init__(self, geometry: RamGeometry) -> None:
        """Create an empty simulator for a geometry.

        Args:
            geometry: Memory geometry; depth and data width never change
        """
        self.geometry = geometry
        self.ram_words: dict[Address, DataWord] = {}
        self._logs: list[str] = []

    @classmethod
    def for_size_class(cls, size_class: MemorySizeClass | str) -> "MemorySimulator":
        """Create a simulator for a preset size class."""
        return cls(RamGeometry.from_size_class(size_class))

    @property
    def depth(self) -> int:
        return self.geometry.depth

    @property
    def data_width(self) -> int:
        return self.geometry.data_width

    @property
    def has_errors(self) -> bool:
        """True if any log entry carries the error token."""
        return any(LOG_ERROR_TOKEN in entry for entry in self._logs)

    def write(self, address: int, value: int) -> bool:
        """Store a value, masked to the data width.

        Args:
            address: Word address
            value: Value to store (bits above data_width are dropped)

        Returns:
            True on success, False if the address is out of range (logged,
            storage untouched)
        """
        if not is_address_in_range(address, self.depth):
            self._logs.append(
                SimulationLogger.log_boundary_violation("WRITE", address, self.depth)
            )
            return False

        stored = DataWord(mask_to_width(value, self.data_width))
        self.ram_words[Address(address)] = stored
        self._logs.append(SimulationLogger.log_write(address, stored))
        return True

    def read(self, address: int) -> ReadResult:
        """Read a value back.

        An address that was never written is not an error: the log records
        an uninitialized marker and the result carries ``value=None``.

        Args:
            address: Word address

        Returns:
            ReadResult with success=False for out-of-range addresses
        """
        if not is_address_in_range(address, self.depth):
            self._logs.append(
                SimulationLogger.log_boundary_violation("READ", address, self.depth)
            )
            return ReadResult(success=False, value=None)

        value = self.ram_words.get(Address(address))
        self._logs.append(SimulationLogger.log_read(address, value))
        return ReadResult(success=True, value=value)

    def run_basic_test(self) -> list[str]:
        """Run the built-in write/read sequence and return the accumulated log.

        Writes the canonical vectors (first word, second word, midpoint,
        last word), reads each back and compares. A mismatch appends an
        entry containing the error token; the final entry is a pass/fail
        summary.

        Returns:
            Copy of the full log, including entries from earlier calls
        """
        self._logs.append(
            SimulationLogger.log_test_start(BASIC_TEST_NAME, self.depth, self.data_width)
        )
        vectors = canonical_test_vectors(self.depth, self.data_width)

        for address, value in vectors:
            self.write(address, value)

        failures = 0
        for address, expected in vectors:
            result = self.read(address)
            if not result.success or result.value != expected:
                failures += 1
                self._logs.append(
                    SimulationLogger.log_mismatch(address, expected, result.value)
                )

        self._logs.append(
            SimulationLogger.log_test_summary(BASIC_TEST_NAME, len(vectors), failures)
        )
        return self.get_logs()

    def reset(self) -> None:
        """Clear storage and log; geometry is unchanged."""
        self.ram_words.clear()
        self._logs.clear()

    def get_logs(self) -> list[str]:
        """Return a copy of the log in append order."""
        return list(self._logs)
