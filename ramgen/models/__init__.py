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

"""Reference models for generated RAM behavior.

This package contains software models that compute the expected behavior
of each generated module variant. They are used by the ``simulate`` CLI
command and as scoreboards in the cocotb tests.

Modules
-------
memory_model
    Behavioral simulator with the read/write/log contract:
    - Sparse word storage masked to the data width
    - Boundary checking without partial mutation
    - Built-in basic read/write test

ecc_model
    Odd-weight-column single-error-correcting code:
    - Encode, syndrome and decode with CLEAN/CORRECTED/UNCORRECTABLE status
    - Tables rendered into the ECC RAM so RTL and model agree

dual_port_model
    Two ports over one array with collision and write-hazard handling

pipeline_model
    Shift-chain model with storage access at the final stage

Usage
-----
::

    from ramgen.models import MemorySimulator
    from ramgen.configuration import RamGeometry

    sim = MemorySimulator(RamGeometry.from_size_class("8GB"))
    sim.write(0x1000, 0xDEADBEEF)
    logs = sim.get_logs()
"""

from ramgen.models.dual_port_model import (
    DualPortCycleResult,
    DualPortMemoryModel,
    PortRequest,
)
from ramgen.models.ecc_model import EccCode, EccDecodeResult, EccStatus, ecc_check_width
from ramgen.models.memory_model import MemorySimulator, ReadResult
from ramgen.models.pipeline_model import PipelinedMemoryModel, PipelineOutput

__all__ = [
    "DualPortCycleResult",
    "DualPortMemoryModel",
    "PortRequest",
    "EccCode",
    "EccDecodeResult",
    "EccStatus",
    "ecc_check_width",
    "MemorySimulator",
    "ReadResult",
    "PipelinedMemoryModel",
    "PipelineOutput",
]
