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

"""Generator dispatch tables.

Dispatch
========

Structural dispatch is an ordered table of (predicate, generator id) pairs
evaluated top to bottom; the first matching predicate wins. Bus-protocol
compliance dominates the internal memory organization, so AXI4 is checked
first:

    1. bus_interface == AXI4             -> AXI4
    2. memory_architecture == DUAL_PORT  -> DUAL_PORT
    3. memory_architecture == ECC        -> ECC
    4. memory_architecture == PIPELINED  -> PIPELINED
    5. (always)                          -> STANDARD

Avalon and Wishbone interfaces have no dedicated generator and fall through
to the architecture rules.

Testbench dispatch is a plain methodology -> renderer table, independent of
the structural choice.

Table Structure:
    STRUCTURAL_GENERATORS: id -> (render function, port style)
    TESTBENCH_RENDERERS:   id -> render function
"""

from collections.abc import Callable

from ramgen.configuration import (
    BusInterface,
    DutBinding,
    FeatureSet,
    MemoryArchitecture,
    PortStyle,
    RamGeometry,
    StructuralGeneratorId,
    TestbenchRendererId,
    VerificationMethodology,
)
from ramgen.generators.structural import (
    module_name,
    render_axi4,
    render_dual_port,
    render_ecc,
    render_pipelined,
    render_standard,
)
from ramgen.generators.testbenches import (
    render_coverage,
    render_directed,
    render_randomized,
    render_verification_env,
)
from ramgen.utils.validation import coerce_enum

STRUCTURAL_PRECEDENCE: tuple[tuple[Callable[[FeatureSet], bool], StructuralGeneratorId], ...] = (
    (lambda f: f.bus_interface is BusInterface.AXI4, StructuralGeneratorId.AXI4),
    (
        lambda f: f.memory_architecture is MemoryArchitecture.DUAL_PORT,
        StructuralGeneratorId.DUAL_PORT,
    ),
    (lambda f: f.memory_architecture is MemoryArchitecture.ECC, StructuralGeneratorId.ECC),
    (
        lambda f: f.memory_architecture is MemoryArchitecture.PIPELINED,
        StructuralGeneratorId.PIPELINED,
    ),
    (lambda f: True, StructuralGeneratorId.STANDARD),
)

STRUCTURAL_GENERATORS: dict[StructuralGeneratorId, tuple[Callable[..., str], PortStyle]] = {
    StructuralGeneratorId.AXI4: (render_axi4, PortStyle.AXI4),
    StructuralGeneratorId.DUAL_PORT: (render_dual_port, PortStyle.DUAL_PORT),
    StructuralGeneratorId.ECC: (render_ecc, PortStyle.SIMPLE),
    StructuralGeneratorId.PIPELINED: (render_pipelined, PortStyle.SIMPLE),
    StructuralGeneratorId.STANDARD: (render_standard, PortStyle.SIMPLE),
}

TESTBENCH_SELECTION: dict[VerificationMethodology, TestbenchRendererId] = {
    VerificationMethodology.DIRECTED: TestbenchRendererId.DIRECTED,
    VerificationMethodology.COVERAGE: TestbenchRendererId.COVERAGE,
    VerificationMethodology.RANDOMIZED: TestbenchRendererId.RANDOMIZED,
    VerificationMethodology.VERIFICATION_ENV: TestbenchRendererId.VERIFICATION_ENV,
}

TESTBENCH_RENDERERS: dict[TestbenchRendererId, Callable[..., str]] = {
    TestbenchRendererId.DIRECTED: render_directed,
    TestbenchRendererId.COVERAGE: render_coverage,
    TestbenchRendererId.RANDOMIZED: render_randomized,
    TestbenchRendererId.VERIFICATION_ENV: render_verification_env,
}


def select_structural_generator(features: FeatureSet) -> StructuralGeneratorId:
    """Return the first generator whose predicate matches."""
    for predicate, generator in STRUCTURAL_PRECEDENCE:
        if predicate(features):
            return generator
    raise AssertionError("structural precedence table has no fallback")  # unreachable


def select_testbench_renderer(
    methodology: VerificationMethodology | str,
) -> TestbenchRendererId:
    """Return the renderer for a verification methodology."""
    methodology = coerce_enum(methodology, VerificationMethodology, "test_methodology")
    return TESTBENCH_SELECTION[methodology]


def dut_binding(
    generator: StructuralGeneratorId, geometry: RamGeometry, features: FeatureSet
) -> DutBinding:
    """Describe how testbenches connect to the module a generator emits."""
    _, port_style = STRUCTURAL_GENERATORS[generator]
    return DutBinding(
        module_name=module_name(generator, geometry),
        port_style=port_style,
        shared_clock=features.clock_domain_count == 1,
    )
