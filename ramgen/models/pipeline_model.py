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

"""Cycle-level reference model of the pipelined RAM.

Pipeline Model
==============

Requests enter a shift chain of ``stages`` registers. Storage is touched only
when a request leaves the last register, so an operation presented before
edge 1 completes on edge ``stages + 1``, when ``valid`` asserts for exactly
one edge. Out-of-range requests travel through the chain but never touch
storage and never assert ``valid``.

``data_out`` is a register: it keeps its last read value until the next
completed read.
"""

from collections import deque
from typing import NamedTuple

from ramgen.config import MAX_PIPELINE_STAGES, MIN_PIPELINE_STAGES
from ramgen.configuration import RamGeometry
from ramgen.ram_types import Address, CycleCount, DataWord
from ramgen.utils.memory_utils import is_address_in_range, mask_to_width
from ramgen.utils.validation import check_in_range


class _StageEntry(NamedTuple):
    write_enable: bool
    read_enable: bool
    address: int
    data: int


class PipelineOutput(NamedTuple):
    """Registered outputs after one edge."""

    valid: bool
    data_out: int | None


class PipelinedMemoryModel:
    """Shift-chain model with storage access at the final stage.

    Attributes:
        geometry: Memory geometry
        stages: Number of pipeline registers before the storage access
        cycles: Edges applied since construction or reset
    """

    def __init__(self, geometry: RamGeometry, stages: int) -> None:
        check_in_range(stages, MIN_PIPELINE_STAGES, MAX_PIPELINE_STAGES, "pipeline_stages")
        self.geometry = geometry
        self.stages = stages
        self.ram_words: dict[Address, DataWord] = {}
        self.reset()

    @property
    def latency(self) -> int:
        """Edges from presenting a request to ``valid``."""
        return self.stages + 1

    def clock(
        self,
        write_enable: bool = False,
        read_enable: bool = False,
        address: int = 0,
        data: int = 0,
    ) -> PipelineOutput:
        """Apply one clock edge with the given inputs."""
        final = self._chain[-1]
        valid = False
        if final is not None and (final.write_enable or final.read_enable):
            if is_address_in_range(final.address, self.geometry.depth):
                valid = True
                if final.read_enable:
                    self._data_out = self.ram_words.get(Address(final.address))
                if final.write_enable:
                    self.ram_words[Address(final.address)] = DataWord(
                        mask_to_width(final.data, self.geometry.data_width)
                    )

        self._chain.appendleft(_StageEntry(write_enable, read_enable, address, data))
        self.cycles = CycleCount(self.cycles + 1)
        return PipelineOutput(valid=valid, data_out=self._data_out)

    def flush(self) -> list[PipelineOutput]:
        """Clock idle inputs until every in-flight request has completed."""
        return [self.clock() for _ in range(self.stages)]

    def reset(self) -> None:
        """Clear the chain and output register; storage is kept, as in the RTL."""
        self._chain: deque[_StageEntry | None] = deque(
            [None] * self.stages, maxlen=self.stages
        )
        self._data_out: int | None = None
        self.cycles = CycleCount(0)
