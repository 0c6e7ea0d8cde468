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

"""Type aliases for the RAM generator and its reference models.

Types
=====
"""

from typing import NewType

# Memory-related types
Address = NewType("Address", int)
"""Word address into the memory array (0 to depth-1 when valid)."""

DataWord = NewType("DataWord", int)
"""Stored value, masked to the configured data width."""

# ECC-related types
CheckBits = NewType("CheckBits", int)
"""ECC redundancy bits stored alongside a data word."""

Syndrome = NewType("Syndrome", int)
"""Stored check bits XOR recomputed check bits."""

# Cycle counter
CycleCount = NewType("CycleCount", int)
"""Clock edges applied to a cycle-level reference model."""
