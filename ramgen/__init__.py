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

"""Configuration-driven SystemVerilog RAM generator.

ramgen emits a memory module, a matching testbench and, optionally, a UVM
verification environment from one configuration, all agreeing on data
width, address width, depth and the other derived parameters. A behavioral
simulator checks read/write sequences against the same configuration.

Package Structure
-----------------
config
    Central constants: size-class tables, range limits, AXI codes,
    testbench settings and simulator log tokens

configuration
    Immutable configuration model (geometry, features, interface profile)
    and generation results

generators/
    Parameter derivation, dispatch tables, structural generators,
    testbench renderers and the consistency checker

generator
    ``generate_bundle``: the full pipeline for one configuration

models/
    Behavioral simulator and reference models (ECC, dual-port, pipeline)

session
    Active configuration with its bundle and simulator

cli
    ``ramgen`` command-line entry point

Example
-------
::

    from ramgen import FeatureSet, RamGeometry, generate_bundle

    bundle = generate_bundle(
        RamGeometry.from_size_class("16GB"),
        FeatureSet(bus_interface="axi4", memory_architecture="ecc"),
    )
    print(bundle.module_name)  # axi4_ram_16gb
"""

from ramgen.configuration import (
    BurstPolicy,
    BusInterface,
    DerivedParameters,
    DutBinding,
    FeatureSet,
    GeneratedBundle,
    InterfaceProfile,
    MemoryArchitecture,
    MemorySizeClass,
    RamGeometry,
    VerificationMethodology,
)
from ramgen.exceptions import (
    ConfigurationError,
    ConsistencyError,
    GenerationError,
    RamGenError,
)
from ramgen.generator import generate_bundle, generate_preset
from ramgen.models.memory_model import MemorySimulator
from ramgen.session import RamGeneratorSession

__all__ = [
    "BurstPolicy",
    "BusInterface",
    "DerivedParameters",
    "DutBinding",
    "FeatureSet",
    "GeneratedBundle",
    "InterfaceProfile",
    "MemoryArchitecture",
    "MemorySizeClass",
    "RamGeometry",
    "VerificationMethodology",
    "ConfigurationError",
    "ConsistencyError",
    "GenerationError",
    "RamGenError",
    "generate_bundle",
    "generate_preset",
    "MemorySimulator",
    "RamGeneratorSession",
]
