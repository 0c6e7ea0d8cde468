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

"""Utility functions for the RAM generator.

Modules
-------
memory_utils
    Width masking, address range checks, canonical test vectors,
    coverage buckets and data patterns

sim_logger
    Structured log entries for the behavioral simulator

validation
    Configuration checks raising ConfigurationError, and the
    ``assert_equals`` consistency assertion

verilog_utils
    Sized Verilog literal formatting (registered as template filters)
"""

from ramgen.utils.memory_utils import format_hex, mask_to_width, width_mask
from ramgen.utils.validation import assert_equals, coerce_enum

# Note: SimulationLogger is not imported at package level; import it from
# ramgen.utils.sim_logger where needed.

__all__ = [
    "format_hex",
    "mask_to_width",
    "width_mask",
    "assert_equals",
    "coerce_enum",
]
