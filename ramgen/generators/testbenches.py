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

"""Testbench renderers.

Testbench Renderers
===================

Four pure render functions, one per verification methodology. Each takes
the geometry, derived parameters, feature set and the ``DutBinding`` of the
module chosen by structural dispatch, and returns testbench text that
instantiates and drives that module through its own port style.

    render_directed           canonical write/read vectors, PASS/FAIL summary
    render_coverage           covergroup over address thirds, data patterns
                              and operations, with per-axis report
    render_randomized         constrained-random stimulus with shadow memory
    render_verification_env   UVM interface/sequence/driver/monitor/
                              scoreboard/agent/env/test/top

Every renderer reads its numbers from ``DerivedParameters`` and the shared
helpers in ``ramgen.utils.memory_utils``; none of them invents a width,
depth or address.
"""

from typing import Any

from ramgen.config import (
    CLOCK_PERIOD_NS,
    OPERATION_WEIGHTS,
    RANDOM_TEST_ITERATIONS,
    RESET_CYCLES,
    TIMEOUT_MARGIN_CYCLES,
    UVM_SEQUENCE_LENGTH,
)
from ramgen.configuration import DerivedParameters, DutBinding, FeatureSet, RamGeometry
from ramgen.generators.structural import axi_context
from ramgen.generators.template_engine import render_template
from ramgen.utils.memory_utils import address_buckets, canonical_test_vectors, data_patterns


def bench_module_name(dut: DutBinding, suffix: str = "tb") -> str:
    """Return the top-level testbench module name for a DUT."""
    return f"{dut.module_name}_{suffix}"


def timeout_cycles(derived: DerivedParameters) -> int:
    """Cycles a driving task waits for a handshake before flagging an error."""
    return (
        derived.read_latency
        + derived.write_latency
        + derived.pipeline_stages
        + TIMEOUT_MARGIN_CYCLES
    )


def _bench_context(
    geometry: RamGeometry,
    derived: DerivedParameters,
    features: FeatureSet,
    dut: DutBinding,
    tb_suffix: str = "tb",
) -> dict[str, Any]:
    return {
        "tb_name": bench_module_name(dut, tb_suffix),
        "dut": dut,
        "geometry": geometry,
        "p": derived,
        "f": features,
        "bench": {
            "clock_period": CLOCK_PERIOD_NS,
            "reset_cycles": RESET_CYCLES,
            "timeout_cycles": timeout_cycles(derived),
            "axi": axi_context(derived, features),
        },
    }


def render_directed(
    geometry: RamGeometry, derived: DerivedParameters, features: FeatureSet, dut: DutBinding
) -> str:
    """Render the directed testbench.

    Uses the same canonical vectors as ``MemorySimulator.run_basic_test``.
    """
    return render_template(
        "directed_tb.sv.j2",
        vectors=canonical_test_vectors(derived.depth, derived.data_width),
        **_bench_context(geometry, derived, features, dut),
    )


def render_coverage(
    geometry: RamGeometry, derived: DerivedParameters, features: FeatureSet, dut: DutBinding
) -> str:
    """Render the coverage-driven testbench."""
    return render_template(
        "coverage_tb.sv.j2",
        buckets=address_buckets(derived.depth),
        patterns=data_patterns(derived.data_width),
        **_bench_context(geometry, derived, features, dut),
    )


def render_randomized(
    geometry: RamGeometry, derived: DerivedParameters, features: FeatureSet, dut: DutBinding
) -> str:
    """Render the constrained-random testbench."""
    return render_template(
        "randomized_tb.sv.j2",
        iterations=RANDOM_TEST_ITERATIONS,
        weights=OPERATION_WEIGHTS,
        **_bench_context(geometry, derived, features, dut),
    )


def render_verification_env(
    geometry: RamGeometry, derived: DerivedParameters, features: FeatureSet, dut: DutBinding
) -> str:
    """Render the UVM verification environment (interface, package and top)."""
    return render_template(
        "uvm_env.sv.j2",
        sequence_length=UVM_SEQUENCE_LENGTH,
        **_bench_context(geometry, derived, features, dut, tb_suffix="uvm_tb"),
    )
