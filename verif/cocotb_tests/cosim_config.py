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

"""Co-simulation variant table shared by the Makefile and the cocotb tests.

Cosim Config
============

Each ``RAM_VARIANT`` names one structural generator plus the feature set
used to exercise it on a reduced geometry. The Makefile runs this module to
render the RTL and learn the top-level name; the tests import it to build
the very same configuration for their reference models.

Environment:
    RAM_VARIANT           standard | ecc | dual_port | pipelined | axi4
    RAM_ADDRESS_WIDTH     reduced address width (default 8, depth 256)
    RAM_PIPELINE_STAGES   pipelined variant only (default 2)

Usage (from the Makefile)::

    python -m cocotb_tests.cosim_config --output-dir sim_build/rtl
    # prints the generated module name, e.g. ecc_ram_8gb_a8
"""

import argparse
import os
import sys
from pathlib import Path

from ramgen import FeatureSet, GeneratedBundle, RamGeometry, generate_bundle

DEFAULT_VARIANT = "standard"
DEFAULT_ADDRESS_WIDTH = 8
DEFAULT_PIPELINE_STAGES = 2

# variant -> (size class, FeatureSet overrides)
VARIANTS: dict[str, tuple[str, dict[str, object]]] = {
    "standard": ("8GB", {"memory_architecture": "standard"}),
    "ecc": ("8GB", {"memory_architecture": "ecc", "ecc_enabled": True}),
    "dual_port": ("8GB", {"memory_architecture": "dual_port"}),
    "pipelined": ("8GB", {"memory_architecture": "pipelined"}),
    # 16GB profile: 128-bit bus, bursts of up to 8 beats
    "axi4": ("16GB", {"bus_interface": "axi4", "burst_policy": "sequential"}),
}


def variant() -> str:
    name = os.environ.get("RAM_VARIANT", DEFAULT_VARIANT)
    if name not in VARIANTS:
        raise ValueError(f"Unknown RAM_VARIANT {name!r}, expected one of {sorted(VARIANTS)}")
    return name


def geometry() -> RamGeometry:
    size_class, _ = VARIANTS[variant()]
    address_width = int(os.environ.get("RAM_ADDRESS_WIDTH", DEFAULT_ADDRESS_WIDTH))
    return RamGeometry.custom_geometry(address_width, size_class=size_class)


def pipeline_stages() -> int:
    return int(os.environ.get("RAM_PIPELINE_STAGES", DEFAULT_PIPELINE_STAGES))


def features() -> FeatureSet:
    _, overrides = VARIANTS[variant()]
    return FeatureSet(pipeline_stages=pipeline_stages(), **overrides)


def bundle() -> GeneratedBundle:
    """Generate the bundle for the active variant."""
    return generate_bundle(geometry(), features())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render RTL for the active RAM_VARIANT")
    parser.add_argument("--output-dir", required=True, help="Directory for the module file")
    args = parser.parse_args(argv)

    generated = bundle()
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    (output_dir / f"{generated.module_name}.sv").write_text(generated.module_text)
    print(generated.module_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
