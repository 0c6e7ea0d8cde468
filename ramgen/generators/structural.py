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

"""Structural RAM generators.

Structural Generators
=====================

Five pure render functions, one per module variant. Each takes the
geometry, the derived parameters and the feature set, and returns the
module text. No generator computes a width or depth of its own: every
number in the emitted HDL comes from ``DerivedParameters`` (or, for the
ECC tables, from an ``EccCode`` built from the derived data width).

    render_standard    minimal synchronous read/write with ready
    render_ecc         data + check-bit arrays, encode on write, correct on read
    render_dual_port   two clocked ports over one array, collision handling
    render_pipelined   PIPE_STAGES register chain, access at the last stage
    render_axi4        AXI4 slave with write and read state machines

Module names are ``<prefix>_<geometry suffix>``, e.g. ``std_ram_8gb`` or
``axi4_ram_16gb_a10`` for a reduced co-simulation geometry.
"""

from ramgen.config import (
    AXI_BURST_FIXED,
    AXI_BURST_INCR,
    AXI_BURST_WRAP,
    AXI_ID_WIDTH,
    AXI_RESP_OKAY,
    AXI_RESP_SLVERR,
)
from ramgen.configuration import (
    BurstPolicy,
    DerivedParameters,
    FeatureSet,
    RamGeometry,
    StructuralGeneratorId,
)
from ramgen.generators.template_engine import render_template
from ramgen.models.ecc_model import EccCode

MODULE_PREFIXES: dict[StructuralGeneratorId, str] = {
    StructuralGeneratorId.STANDARD: "std_ram",
    StructuralGeneratorId.AXI4: "axi4_ram",
    StructuralGeneratorId.ECC: "ecc_ram",
    StructuralGeneratorId.DUAL_PORT: "dual_port_ram",
    StructuralGeneratorId.PIPELINED: "pipelined_ram",
}

# Default AXI burst type per burst policy (used for reserved AxBURST codes)
BURST_TYPE_CODES: dict[BurstPolicy, int] = {
    BurstPolicy.NONE: AXI_BURST_FIXED,
    BurstPolicy.SEQUENTIAL: AXI_BURST_INCR,
    BurstPolicy.WRAPPING: AXI_BURST_WRAP,
}


def module_name(generator: StructuralGeneratorId, geometry: RamGeometry) -> str:
    """Return the HDL module name for a generator and geometry.

    Examples:
        >>> module_name(StructuralGeneratorId.STANDARD, RamGeometry.from_size_class("8GB"))
        'std_ram_8gb'
    """
    return f"{MODULE_PREFIXES[generator]}_{geometry.module_suffix}"


def axi_size_code(data_width: int) -> int:
    """AxSIZE encoding for one memory word (log2 of its byte count)."""
    return (data_width // 8).bit_length() - 1


def axi_context(derived: DerivedParameters, features: FeatureSet) -> dict[str, int]:
    """AXI constants shared by the AXI module and AXI testbench bindings."""
    return {
        "id_width": AXI_ID_WIDTH,
        "size_code": axi_size_code(derived.data_width),
        "burst_type": BURST_TYPE_CODES[features.burst_policy],
        "burst_fixed": AXI_BURST_FIXED,
        "burst_incr": AXI_BURST_INCR,
        "burst_wrap": AXI_BURST_WRAP,
        "resp_okay": AXI_RESP_OKAY,
        "resp_slverr": AXI_RESP_SLVERR,
    }


def _render(
    template: str,
    generator: StructuralGeneratorId,
    geometry: RamGeometry,
    derived: DerivedParameters,
    features: FeatureSet,
    **extra,
) -> str:
    return render_template(
        template,
        module_name=module_name(generator, geometry),
        geometry=geometry,
        p=derived,
        f=features,
        **extra,
    )


def render_standard(
    geometry: RamGeometry, derived: DerivedParameters, features: FeatureSet
) -> str:
    """Render the standard synchronous RAM."""
    return _render(
        "standard_ram.sv.j2", StructuralGeneratorId.STANDARD, geometry, derived, features
    )


def render_ecc(geometry: RamGeometry, derived: DerivedParameters, features: FeatureSet) -> str:
    """Render the ECC-protected RAM.

    The encode masks and the syndrome-to-bit correction table are taken
    from ``EccCode`` so the RTL matches the Python reference model bit for
    bit. ``features.ecc_enabled`` turns on write-back of corrected words.
    """
    return _render(
        "ecc_ram.sv.j2",
        StructuralGeneratorId.ECC,
        geometry,
        derived,
        features,
        ecc=EccCode(derived.data_width),
    )


def render_dual_port(
    geometry: RamGeometry, derived: DerivedParameters, features: FeatureSet
) -> str:
    """Render the dual-port RAM; ports share a clock when there is one clock domain."""
    return _render(
        "dual_port_ram.sv.j2",
        StructuralGeneratorId.DUAL_PORT,
        geometry,
        derived,
        features,
        shared_clock=features.clock_domain_count == 1,
    )


def render_pipelined(
    geometry: RamGeometry, derived: DerivedParameters, features: FeatureSet
) -> str:
    """Render the pipelined RAM with ``derived.pipeline_stages`` stages."""
    return _render(
        "pipelined_ram.sv.j2", StructuralGeneratorId.PIPELINED, geometry, derived, features
    )


def render_axi4(geometry: RamGeometry, derived: DerivedParameters, features: FeatureSet) -> str:
    """Render the AXI4 slave RAM.

    The bus is ``interface_width`` bits wide; bursts longer than
    ``burst_length`` beats are answered with SLVERR, and the burst policy
    sets the BURST_TYPE parameter.
    """
    return _render(
        "axi4_ram.sv.j2",
        StructuralGeneratorId.AXI4,
        geometry,
        derived,
        features,
        axi=axi_context(derived, features),
    )
