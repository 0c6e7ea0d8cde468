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

"""Completion monitor for simple-port RAM modules.

The monitor samples ``ready`` on every falling edge. Each completion pops
one expectation from a shared queue: ``None`` for a write (only the
completion is counted) or the expected read data. Because the monitor
matches completions in order rather than by cycle, the same code checks the
one-cycle standard RAM and a pipelined RAM with requests in flight.
"""

from collections import deque
from typing import Any

import cocotb
from cocotb.triggers import FallingEdge


class CompletionMonitor:
    """In-order checker for ready/data_out completions.

    Attributes:
        expected: Queue of expected read data (None for writes)
        completions: Number of completions checked so far
    """

    def __init__(self, dut: Any, expected: deque[int | None], name: str = "ram") -> None:
        self.clock = dut.clk
        self.reset_n = dut.rst_n
        self.ready = dut.ready
        self.data_out = dut.data_out
        self.expected = expected
        self.name = name
        self.completions = 0

    async def run(self) -> None:
        """Check completions forever; start with ``cocotb.start_soon``."""
        while True:
            await FallingEdge(self.clock)
            if str(self.reset_n.value) != "1" or str(self.ready.value) != "1":
                continue

            if not self.expected:
                raise AssertionError(
                    f"{self.name}: unexpected completion, "
                    f"RANDOM_SEED {cocotb.RANDOM_SEED}"
                )
            expected = self.expected.popleft()
            self.completions += 1
            if expected is None:
                continue

            actual = int(self.data_out.value)
            assert actual == expected, (
                f"{self.name}: read data mismatch on completion {self.completions}: "
                f"got 0x{actual:X}, expected 0x{expected:X}, "
                f"RANDOM_SEED {cocotb.RANDOM_SEED}"
            )
