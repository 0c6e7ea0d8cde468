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

"""Bundle assembly.

Generator
=========

``generate_bundle`` runs the whole pipeline for one configuration:

    derive parameters
      -> structural dispatch -> one module text
      -> testbench dispatch  -> one testbench text
      -> verification environment, rendered at most once
      -> consistency check
      -> GeneratedBundle

The verification environment is needed when the methodology is
VERIFICATION_ENV or the compliance flag is set. It is rendered once and,
when the methodology selected it, the same text is also the testbench.
"""

import logging

from ramgen.configuration import (
    FeatureSet,
    GeneratedBundle,
    InterfaceProfile,
    MemorySizeClass,
    RamGeometry,
    TestbenchRendererId,
)
from ramgen.generators.consistency import check_bundle
from ramgen.generators.dispatch import (
    STRUCTURAL_GENERATORS,
    TESTBENCH_RENDERERS,
    dut_binding,
    select_structural_generator,
    select_testbench_renderer,
)
from ramgen.generators.parameters import derive
from ramgen.generators.testbenches import render_verification_env
from ramgen.utils.validation import coerce_enum

log = logging.getLogger(__name__)


def generate_bundle(
    geometry: RamGeometry,
    features: FeatureSet,
    profile: InterfaceProfile | None = None,
    check: bool = True,
) -> GeneratedBundle:
    """Generate module, testbench and optional verification text.

    Args:
        geometry: Memory geometry (preset or custom)
        features: Feature set
        profile: Custom interface profile, or None for the size-class preset
        check: Run the consistency checker on the result

    Returns:
        A new, frozen GeneratedBundle

    Raises:
        ConfigurationError: If the profile is incompatible with the geometry
        GenerationError: If a template fails to render
        ConsistencyError: If a generated text disagrees with the parameters
    """
    derived = derive(geometry, features, profile)

    structural = select_structural_generator(features)
    render_module, _ = STRUCTURAL_GENERATORS[structural]
    dut = dut_binding(structural, geometry, features)
    log.info(
        "Generating %s RAM with %s interface (%s architecture requested)",
        geometry.label,
        features.bus_interface.value,
        features.memory_architecture.value,
    )
    log.debug("Structural generator %s -> %s", structural.value, dut.module_name)
    module_text = render_module(geometry, derived, features)

    renderer = select_testbench_renderer(features.test_methodology)
    verification_text = None
    if features.needs_verification_env:
        verification_text = render_verification_env(geometry, derived, features, dut)

    if renderer is TestbenchRendererId.VERIFICATION_ENV and verification_text is not None:
        testbench_text = verification_text
    else:
        testbench_text = TESTBENCH_RENDERERS[renderer](geometry, derived, features, dut)
    log.debug("Testbench renderer %s", renderer.value)

    if check:
        check_bundle(module_text, testbench_text, verification_text, derived, dut)

    return GeneratedBundle(
        module_text=module_text,
        testbench_text=testbench_text,
        verification_text=verification_text,
        structural_generator=structural,
        testbench_renderer=renderer,
        dut=dut,
        parameters=derived,
    )


def generate_preset(size_class: MemorySizeClass | str) -> GeneratedBundle:
    """Generate the bundle for a size class with its shipped feature preset."""
    size_class = coerce_enum(size_class, MemorySizeClass, "size_class")
    return generate_bundle(RamGeometry.from_size_class(size_class), FeatureSet.preset(size_class))
