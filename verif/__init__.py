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

"""Co-simulation environment for generated RAM modules.

This package runs RTL emitted by ``ramgen`` under a Verilog simulator with
cocotb and checks it cycle by cycle against the Python reference models in
``ramgen.models``.

Package Structure
-----------------

Subpackages:
    cocotb_tests
        Variant selection, pin-level drivers and the test module

    monitors
        In-order completion checker for simple-port modules

Quick Start
-----------
From this directory::

    make                                  # standard RAM, 8-bit address
    make RAM_VARIANT=ecc
    make RAM_VARIANT=pipelined RAM_PIPELINE_STAGES=4
    make RAM_VARIANT=axi4 COCOTB_TEST_FILTER=test_axi_wrap_burst
"""

from ramgen.config import CLOCK_PERIOD_NS, RESET_CYCLES

__all__ = [
    "CLOCK_PERIOD_NS",
    "RESET_CYCLES",
]
