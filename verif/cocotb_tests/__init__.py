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

"""Test cases and infrastructure for generated RAM co-simulation.

Test Modules
------------

Tests:
    test_generated_ram
        Canonical vectors, random traffic, ECC fault injection,
        pipelined latency and streaming, dual-port collisions and
        AXI4 bursts. Tests that do not match the active variant skip.

Infrastructure:
    cosim_config
        Variant table and RTL rendering; also run by the Makefile to
        produce the Verilog source and top-level name

    ram_interface
        SimpleRamInterface, DualPortRamInterface and AxiRamInterface
        pin-level drivers

Only ``cosim_config`` is imported here: the Makefile loads it outside
the simulator, where the drivers cannot be imported.
"""

from cocotb_tests.cosim_config import VARIANTS, bundle, variant

__all__ = [
    "VARIANTS",
    "bundle",
    "variant",
]
