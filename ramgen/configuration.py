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

"""Configuration data model for RAM generation.

Configuration Model
===================

Immutable value types describing what to generate:

    MemorySizeClass
        Named capacity preset (8GB / 16GB / 32GB)

    RamGeometry
        (data width, address width) with depth derived as 2^address_width,
        either straight from a size class or a reduced custom geometry

    FeatureSet
        Orthogonal interface / architecture / methodology / burst choices
        plus boolean toggles; validated on construction

    InterfaceProfile
        Bus width, burst length, latencies and power settings, looked up
        per size class or supplied by the caller

    DerivedParameters
        Every number a generator is allowed to use

    DutBinding, GeneratedBundle
        The result of one generation run

Nothing in this module performs generation; see ``ramgen.generator``.
"""

from dataclasses import dataclass, field
from enum import Enum

from ramgen.config import (
    DATA_WIDTH,
    MAX_ADDRESS_WIDTH,
    MAX_BURST_LENGTH,
    MAX_CLOCK_DOMAINS,
    MAX_PIPELINE_STAGES,
    MIN_ADDRESS_WIDTH,
    MIN_CLOCK_DOMAINS,
    MIN_DATA_WIDTH,
    MIN_PIPELINE_STAGES,
    PRESET_FEATURES,
    PRESET_PROFILES,
    SIZE_CLASS_ADDRESS_WIDTH,
)
from ramgen.utils.validation import (
    check_bool,
    check_in_range,
    check_int,
    check_power_of_two,
    coerce_enum,
)
from ramgen.exceptions import ConfigurationError


# ============================================================================
# Enumerations
# ============================================================================


class MemorySizeClass(str, Enum):
    """Capacity preset; each step adds one address bit."""

    SMALL = "8GB"
    MEDIUM = "16GB"
    LARGE = "32GB"


class BusInterface(str, Enum):
    SIMPLE = "simple"
    AXI4 = "axi4"
    AVALON = "avalon"
    WISHBONE = "wishbone"


class MemoryArchitecture(str, Enum):
    STANDARD = "standard"
    ECC = "ecc"
    DUAL_PORT = "dual_port"
    PIPELINED = "pipelined"


class VerificationMethodology(str, Enum):
    DIRECTED = "basic"
    VERIFICATION_ENV = "uvm"
    COVERAGE = "coverage"
    RANDOMIZED = "randomized"


class BurstPolicy(str, Enum):
    NONE = "none"
    SEQUENTIAL = "sequential"
    WRAPPING = "wrap"


class PortStyle(str, Enum):
    """How a generated module exposes its read/write port(s)."""

    SIMPLE = "simple"
    DUAL_PORT = "dual_port"
    AXI4 = "axi4"


class StructuralGeneratorId(str, Enum):
    AXI4 = "axi4"
    DUAL_PORT = "dual_port"
    ECC = "ecc"
    PIPELINED = "pipelined"
    STANDARD = "standard"


class TestbenchRendererId(str, Enum):
    __test__ = False  # not a pytest test class

    DIRECTED = "directed"
    COVERAGE = "coverage"
    RANDOMIZED = "randomized"
    VERIFICATION_ENV = "verification_env"


# ============================================================================
# Geometry
# ============================================================================


@dataclass(frozen=True)
class RamGeometry:
    """Data width and address width of a memory; depth is always 2^address_width.

    Attributes:
        size_class: Preset this geometry belongs to (selects the interface
            profile when none is supplied)
        data_width: Word width in bits
        address_width: Address bus width in bits
        custom: True when the address/data width differ from the preset
    """

    size_class: MemorySizeClass
    data_width: int
    address_width: int
    custom: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "size_class", coerce_enum(self.size_class, MemorySizeClass, "size_class")
        )
        check_power_of_two(self.data_width, "data_width", minimum=MIN_DATA_WIDTH)
        check_in_range(
            self.address_width, MIN_ADDRESS_WIDTH, MAX_ADDRESS_WIDTH, "address_width"
        )

    @classmethod
    def from_size_class(cls, size_class: MemorySizeClass | str) -> "RamGeometry":
        """Return the preset geometry for a size class."""
        size_class = coerce_enum(size_class, MemorySizeClass, "size_class")
        return cls(
            size_class=size_class,
            data_width=DATA_WIDTH,
            address_width=SIZE_CLASS_ADDRESS_WIDTH[size_class.value],
        )

    @classmethod
    def custom_geometry(
        cls,
        address_width: int,
        size_class: MemorySizeClass | str = MemorySizeClass.SMALL,
        data_width: int = DATA_WIDTH,
    ) -> "RamGeometry":
        """Return a reduced (or widened) geometry that keeps a size class's profile.

        Used for co-simulation, where a 2^27-entry array is impractical.
        """
        return cls(
            size_class=size_class,
            data_width=data_width,
            address_width=address_width,
            custom=True,
        )

    @property
    def depth(self) -> int:
        return 1 << self.address_width

    @property
    def label(self) -> str:
        """Human-readable name, e.g. "8GB" or "8GB_a10" for custom geometries."""
        if self.custom:
            return f"{self.size_class.value}_a{self.address_width}"
        return self.size_class.value

    @property
    def module_suffix(self) -> str:
        return self.label.lower()


# ============================================================================
# Feature set
# ============================================================================


@dataclass(frozen=True)
class FeatureSet:
    """Orthogonal feature choices layered on a geometry.

    Enum fields accept either the member or its string value. Construction
    raises ``ConfigurationError`` for out-of-range values.
    """

    bus_interface: BusInterface = BusInterface.SIMPLE
    memory_architecture: MemoryArchitecture = MemoryArchitecture.STANDARD
    test_methodology: VerificationMethodology = VerificationMethodology.DIRECTED
    burst_policy: BurstPolicy = BurstPolicy.NONE
    ecc_enabled: bool = False
    performance_optimized: bool = False
    verification_env_compliant: bool = False
    coverage_enabled: bool = False
    assertions_enabled: bool = True
    pipeline_stages: int = 1
    clock_domain_count: int = 1
    initialization_source: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "bus_interface", coerce_enum(self.bus_interface, BusInterface, "bus_interface")
        )
        object.__setattr__(
            self,
            "memory_architecture",
            coerce_enum(self.memory_architecture, MemoryArchitecture, "memory_architecture"),
        )
        object.__setattr__(
            self,
            "test_methodology",
            coerce_enum(self.test_methodology, VerificationMethodology, "test_methodology"),
        )
        object.__setattr__(
            self, "burst_policy", coerce_enum(self.burst_policy, BurstPolicy, "burst_policy")
        )
        for toggle in (
            "ecc_enabled",
            "performance_optimized",
            "verification_env_compliant",
            "coverage_enabled",
            "assertions_enabled",
        ):
            check_bool(getattr(self, toggle), toggle)
        check_in_range(
            self.pipeline_stages, MIN_PIPELINE_STAGES, MAX_PIPELINE_STAGES, "pipeline_stages"
        )
        check_in_range(
            self.clock_domain_count, MIN_CLOCK_DOMAINS, MAX_CLOCK_DOMAINS, "clock_domain_count"
        )
        if self.initialization_source is not None and (
            not isinstance(self.initialization_source, str) or not self.initialization_source
        ):
            raise ConfigurationError(
                "initialization_source must be a non-empty string or None",
                value=repr(self.initialization_source),
            )

    @classmethod
    def preset(cls, size_class: MemorySizeClass | str) -> "FeatureSet":
        """Return the feature preset shipped with a size class."""
        size_class = coerce_enum(size_class, MemorySizeClass, "size_class")
        return cls(**PRESET_FEATURES[size_class.value])

    @property
    def needs_verification_env(self) -> bool:
        """True when either trigger asks for the verification environment.

        The methodology choice and the standalone compliance flag are
        independent; the artifact is rendered once if either is set.
        """
        return (
            self.test_methodology is VerificationMethodology.VERIFICATION_ENV
            or self.verification_env_compliant
        )


# ============================================================================
# Interface profile and derived parameters
# ============================================================================


@dataclass(frozen=True)
class InterfaceProfile:
    """Bus width, burst length, latency and power settings."""

    interface_width: int
    burst_length: int
    read_latency: int
    write_latency: int
    power_domain_count: int = 1
    low_power_mode: bool = False
    clock_gating: bool = False

    def __post_init__(self) -> None:
        check_power_of_two(self.interface_width, "interface_width", minimum=8)
        check_in_range(self.burst_length, 1, MAX_BURST_LENGTH, "burst_length")
        check_in_range(self.read_latency, 1, 64, "read_latency")
        check_in_range(self.write_latency, 1, 64, "write_latency")
        check_int(self.power_domain_count, "power_domain_count")
        if self.power_domain_count < 1:
            raise ConfigurationError(
                "power_domain_count must be >= 1", value=self.power_domain_count
            )
        check_bool(self.low_power_mode, "low_power_mode")
        check_bool(self.clock_gating, "clock_gating")

    @classmethod
    def preset(cls, size_class: MemorySizeClass | str) -> "InterfaceProfile":
        size_class = coerce_enum(size_class, MemorySizeClass, "size_class")
        return cls(**PRESET_PROFILES[size_class.value])


@dataclass(frozen=True)
class DerivedParameters:
    """Numbers every generator and renderer consumes; never mutated."""

    data_width: int
    address_width: int
    depth: int
    interface_width: int
    burst_length: int
    ecc_redundancy_width: int
    read_latency: int
    write_latency: int
    power_domain_count: int
    low_power_mode: bool
    clock_gating: bool
    pipeline_stages: int


# ============================================================================
# Generation results
# ============================================================================


@dataclass(frozen=True)
class DutBinding:
    """How a testbench connects to the generated module.

    Attributes:
        module_name: Name of the module under test
        port_style: Port set the module exposes
        shared_clock: For dual-port modules, whether both ports share one clock
    """

    module_name: str
    port_style: PortStyle = PortStyle.SIMPLE
    shared_clock: bool = True


@dataclass(frozen=True)
class GeneratedBundle:
    """Module, testbench and optional verification text for one configuration."""

    module_text: str
    testbench_text: str
    verification_text: str | None
    structural_generator: StructuralGeneratorId
    testbench_renderer: TestbenchRendererId
    dut: DutBinding
    parameters: DerivedParameters = field(repr=False)

    @property
    def module_name(self) -> str:
        return self.dut.module_name
