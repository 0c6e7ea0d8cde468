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

"""Central configuration constants for the RAM generator.

Config
======

Every numeric value that a generator, renderer or model needs comes from
here (or is derived from here by ``generators.parameters.derive``). Keeping
them in one place is what lets the module text, its testbench and the
behavioral simulator agree on widths and depths.

Preset tables are keyed by the size-class *value* ("8GB", "16GB", "32GB")
so this module has no dependency on the configuration dataclasses.
"""

# ============================================================================
# Memory geometry
# ============================================================================

DATA_WIDTH = 64
"""Memory word width in bits, constant across size classes."""

SIZE_CLASS_ADDRESS_WIDTH: dict[str, int] = {
    "8GB": 27,  # 2^27 words * 64 bits = 8GB
    "16GB": 28,  # 2^28 words * 64 bits = 16GB
    "32GB": 29,  # 2^29 words * 64 bits = 32GB
}

MIN_ADDRESS_WIDTH = 4  # keeps the canonical addresses and coverage thirds distinct
MAX_ADDRESS_WIDTH = 30  # DEPTH must fit a 32-bit signed HDL parameter
MIN_DATA_WIDTH = 8

# ============================================================================
# Feature ranges
# ============================================================================

MIN_PIPELINE_STAGES = 1
MAX_PIPELINE_STAGES = 5

MIN_CLOCK_DOMAINS = 1
MAX_CLOCK_DOMAINS = 4

MAX_BURST_LENGTH = 256  # AXI4 INCR bursts carry up to 256 beats

# ============================================================================
# Interface / timing / power presets
# ============================================================================

PRESET_PROFILES: dict[str, dict[str, int | bool]] = {
    "8GB": {
        "interface_width": 64,
        "burst_length": 1,
        "read_latency": 1,
        "write_latency": 1,
        "power_domain_count": 1,
        "low_power_mode": False,
        "clock_gating": False,
    },
    "16GB": {
        "interface_width": 128,
        "burst_length": 8,
        "read_latency": 2,
        "write_latency": 1,
        "power_domain_count": 2,
        "low_power_mode": True,
        "clock_gating": True,
    },
    "32GB": {
        "interface_width": 256,
        "burst_length": 16,
        "read_latency": 3,
        "write_latency": 2,
        "power_domain_count": 4,
        "low_power_mode": True,
        "clock_gating": True,
    },
}

# Feature presets shipped with each size class, by enum value.
PRESET_FEATURES: dict[str, dict[str, object]] = {
    "8GB": {
        "bus_interface": "simple",
        "memory_architecture": "standard",
        "test_methodology": "basic",
        "burst_policy": "none",
        "ecc_enabled": False,
        "pipeline_stages": 1,
        "clock_domain_count": 1,
        "performance_optimized": False,
        "verification_env_compliant": False,
        "coverage_enabled": False,
        "assertions_enabled": True,
    },
    "16GB": {
        "bus_interface": "axi4",
        "memory_architecture": "ecc",
        "test_methodology": "coverage",
        "burst_policy": "sequential",
        "ecc_enabled": True,
        "pipeline_stages": 2,
        "clock_domain_count": 1,
        "performance_optimized": True,
        "verification_env_compliant": False,
        "coverage_enabled": True,
        "assertions_enabled": True,
    },
    "32GB": {
        "bus_interface": "axi4",
        "memory_architecture": "dual_port",
        "test_methodology": "uvm",
        "burst_policy": "wrap",
        "ecc_enabled": True,
        "pipeline_stages": 3,
        "clock_domain_count": 2,
        "performance_optimized": True,
        "verification_env_compliant": True,
        "coverage_enabled": True,
        "assertions_enabled": True,
    },
}

# ============================================================================
# AXI4 protocol constants
# ============================================================================

AXI_ID_WIDTH = 8

AXI_BURST_FIXED = 0b00
AXI_BURST_INCR = 0b01
AXI_BURST_WRAP = 0b10

AXI_RESP_OKAY = 0b00
AXI_RESP_EXOKAY = 0b01
AXI_RESP_SLVERR = 0b10
AXI_RESP_DECERR = 0b11

# ============================================================================
# Testbench parameters
# ============================================================================

CLOCK_PERIOD_NS = 10
RESET_CYCLES = 10

TIMEOUT_MARGIN_CYCLES = 16
"""Extra cycles a testbench waits for ``ready`` beyond the expected latency."""

RANDOM_TEST_ITERATIONS = 10000

OPERATION_WEIGHTS: dict[str, int] = {"idle": 10, "read": 45, "write": 45}
"""Constrained-random operation distribution (idle:read:write)."""

UVM_SEQUENCE_LENGTH = 100

# Canonical data values, cycled across the canonical test addresses.
CANONICAL_TEST_VALUES: tuple[int, ...] = (
    0xDEADBEEF,
    0xCAFEBABE,
    0x123456789ABCDEF0,
    0xFFFFFFFFFFFFFFFF,
)

# ============================================================================
# Simulator log tokens
# ============================================================================

LOG_ERROR_TOKEN = "ERROR"
LOG_UNINITIALIZED_MARKER = "UNINITIALIZED"
LOG_PASS_MARK = "✓"
LOG_FAIL_MARK = "✗"
LOG_WARN_MARK = "⚠"
