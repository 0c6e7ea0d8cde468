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

"""Command-line interface for the RAM generator.

Commands:
    ramgen generate     Write module, testbench and verification files
    ramgen simulate     Run write/read operations on the behavioral simulator
    ramgen module-name  Print the module name a configuration would produce

Addresses and data are parsed here (``int(text, 0)``, so ``0x1000`` and
``4096`` both work); the core only ever sees integers.
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from ramgen.configuration import (
    BurstPolicy,
    BusInterface,
    FeatureSet,
    MemoryArchitecture,
    MemorySizeClass,
    RamGeometry,
    VerificationMethodology,
)
from ramgen.exceptions import RamGenError
from ramgen.generator import generate_bundle
from ramgen.generators.dispatch import select_structural_generator
from ramgen.generators.structural import module_name
from ramgen.models.memory_model import MemorySimulator
from ramgen.utils.sim_logger import log as simulator_log

# CLI flag -> FeatureSet field for the value-carrying feature options
FEATURE_OPTIONS = {
    "interface": "bus_interface",
    "architecture": "memory_architecture",
    "methodology": "test_methodology",
    "burst": "burst_policy",
    "pipeline_stages": "pipeline_stages",
    "clock_domains": "clock_domain_count",
    "init_file": "initialization_source",
    "ecc": "ecc_enabled",
    "performance_optimized": "performance_optimized",
    "uvm_compliant": "verification_env_compliant",
    "coverage": "coverage_enabled",
    "assertions": "assertions_enabled",
}


def parse_int(text: str) -> int:
    """Parse a decimal or 0x-prefixed integer argument."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def parse_write(text: str) -> tuple[str, int, int]:
    """Parse ADDR=DATA into a write operation."""
    address, sep, data = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected ADDR=DATA, got {text!r}")
    return ("write", parse_int(address), parse_int(data))


def parse_read(text: str) -> tuple[str, int, None]:
    return ("read", parse_int(text), None)


def build_geometry(args: argparse.Namespace) -> RamGeometry:
    if args.address_width is None:
        return RamGeometry.from_size_class(args.size)
    return RamGeometry.custom_geometry(args.address_width, size_class=args.size)


def build_features(args: argparse.Namespace) -> FeatureSet:
    """Start from the preset (or defaults) and apply explicit overrides."""
    base = FeatureSet.preset(args.size) if args.preset else FeatureSet()
    overrides = {
        field: getattr(args, option)
        for option, field in FEATURE_OPTIONS.items()
        if getattr(args, option) is not None
    }
    return dataclasses.replace(base, **overrides)


def _add_geometry_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--size",
        choices=[s.value for s in MemorySizeClass],
        default=MemorySizeClass.SMALL.value,
        help="Memory size class (default: 8GB)",
    )
    parser.add_argument(
        "--address-width",
        type=int,
        default=None,
        help="Override the address width (reduced geometry for simulation)",
    )


def _add_feature_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--preset", action="store_true", help="Start from the size class feature preset"
    )
    parser.add_argument("--interface", choices=[e.value for e in BusInterface])
    parser.add_argument("--architecture", choices=[e.value for e in MemoryArchitecture])
    parser.add_argument("--methodology", choices=[e.value for e in VerificationMethodology])
    parser.add_argument("--burst", choices=[e.value for e in BurstPolicy])
    parser.add_argument("--pipeline-stages", type=int)
    parser.add_argument("--clock-domains", type=int)
    parser.add_argument("--init-file", help="$readmemh file loaded at time zero")
    for flag, help_text in (
        ("ecc", "ECC scrubbing (write back corrected words)"),
        ("performance-optimized", "Block RAM style attribute"),
        ("uvm-compliant", "Also emit the UVM verification environment"),
        ("coverage", "Emit cover properties"),
        ("assertions", "Emit SVA assertions"),
    ):
        parser.add_argument(
            f"--{flag}", action=argparse.BooleanOptionalAction, default=None, help=help_text
        )


def cmd_generate(args: argparse.Namespace) -> int:
    bundle = generate_bundle(build_geometry(args), build_features(args))
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    outputs = {
        f"{bundle.module_name}.sv": bundle.module_text,
        f"{bundle.module_name}_tb.sv": bundle.testbench_text,
    }
    verification = bundle.verification_text
    if verification is not None and verification is not bundle.testbench_text:
        outputs[f"{bundle.module_name}_uvm_env.sv"] = verification

    for name, text in outputs.items():
        path = output_dir / name
        path.write_text(text)
        print(f"Wrote {path}")
    return 0


def cmd_simulate(args: argparse.Namespace) -> int:
    simulator = MemorySimulator(build_geometry(args))
    previous_level = simulator_log.level
    if not args.verbose:
        # every entry is printed below; keep it off stderr
        simulator_log.setLevel(logging.CRITICAL + 1)
    try:
        for operation, address, data in args.operations or []:
            if operation == "write":
                simulator.write(address, data)
            else:
                simulator.read(address)
        if args.basic_test:
            simulator.run_basic_test()
    finally:
        simulator_log.setLevel(previous_level)

    for entry in simulator.get_logs():
        print(entry)
    return 1 if simulator.has_errors else 0


def cmd_module_name(args: argparse.Namespace) -> int:
    generator = select_structural_generator(build_features(args))
    print(module_name(generator, build_geometry(args)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ramgen", description="Configuration-driven SystemVerilog RAM generator"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Write module and testbench files")
    _add_geometry_arguments(generate)
    _add_feature_arguments(generate)
    generate.add_argument(
        "--output-dir", default=".", help="Directory for generated files (default: .)"
    )
    generate.set_defaults(handler=cmd_generate)

    simulate = subparsers.add_parser("simulate", help="Run the behavioral simulator")
    _add_geometry_arguments(simulate)
    simulate.add_argument(
        "--write",
        dest="operations",
        action="append",
        type=parse_write,
        metavar="ADDR=DATA",
        help="Write DATA to ADDR (repeatable, applied in order)",
    )
    simulate.add_argument(
        "--read",
        dest="operations",
        action="append",
        type=parse_read,
        metavar="ADDR",
        help="Read ADDR (repeatable, applied in order)",
    )
    simulate.add_argument(
        "--basic-test", action="store_true", help="Run the built-in write/read test"
    )
    simulate.set_defaults(handler=cmd_simulate)

    name = subparsers.add_parser("module-name", help="Print the generated module name")
    _add_geometry_arguments(name)
    _add_feature_arguments(name)
    name.set_defaults(handler=cmd_module_name)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.handler(args)
    except RamGenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
