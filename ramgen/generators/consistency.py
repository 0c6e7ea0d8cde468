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

"""Consistency checks between generated texts and derived parameters.

Consistency Checker
===================

The generators are trusted to read every number from ``DerivedParameters``;
this module verifies that they did. Every ``parameter``/``localparam``
declaration of a checked name found in an artifact must equal its derived
value, and the required names must be present. A mismatch is an invariant
violation and raises ``ConsistencyError``.

Checked names:
    module       DATA_WIDTH, ADDR_WIDTH, DEPTH, IF_WIDTH (required),
                 ECC_WIDTH, PIPE_STAGES, BURST_LEN (when present)
    testbenches  DATA_WIDTH, ADDR_WIDTH, DEPTH (required), IF_WIDTH
                 (when present), plus an instance of the DUT module
"""

import logging
import re

from ramgen.configuration import DerivedParameters, DutBinding
from ramgen.exceptions import ConsistencyError
from ramgen.utils.validation import assert_equals

log = logging.getLogger(__name__)

_DECLARATION = re.compile(
    r"\b(?:parameter|localparam)\s+(?:int\s+(?:unsigned\s+)?)?"
    r"(?P<name>[A-Z_][A-Z0-9_]*)\s*=\s*(?P<value>\d+)\s*[,;)\n]"
)

MODULE_REQUIRED = ("DATA_WIDTH", "ADDR_WIDTH", "DEPTH", "IF_WIDTH")
BENCH_REQUIRED = ("DATA_WIDTH", "ADDR_WIDTH", "DEPTH")


def expected_values(derived: DerivedParameters) -> dict[str, int]:
    """Map HDL parameter names to their derived values."""
    return {
        "DATA_WIDTH": derived.data_width,
        "ADDR_WIDTH": derived.address_width,
        "DEPTH": derived.depth,
        "IF_WIDTH": derived.interface_width,
        "ECC_WIDTH": derived.ecc_redundancy_width,
        "PIPE_STAGES": derived.pipeline_stages,
        "BURST_LEN": derived.burst_length,
    }


def extract_parameters(text: str) -> dict[str, list[int]]:
    """Collect every decimal parameter/localparam declaration by name.

    Examples:
        >>> extract_parameters("parameter DEPTH = 16,\\n localparam DEPTH = 16;")
        {'DEPTH': [16, 16]}
    """
    found: dict[str, list[int]] = {}
    for match in _DECLARATION.finditer(text):
        found.setdefault(match["name"], []).append(int(match["value"]))
    return found


def check_text(
    text: str,
    derived: DerivedParameters,
    artifact: str,
    required: tuple[str, ...],
) -> None:
    """Check one artifact's parameter declarations against derived values.

    Raises:
        ConsistencyError: On a missing required name or a mismatched value
    """
    expected = expected_values(derived)
    found = extract_parameters(text)
    for name in required:
        if name not in found:
            raise ConsistencyError(
                f"{artifact} does not declare {name}",
                parameter=name,
                expected_value=expected[name],
                artifact=artifact,
            )
    for name, values in found.items():
        if name not in expected:
            continue
        for value in values:
            assert_equals(value, expected[name], name, artifact=artifact)


def check_instantiates(text: str, dut: DutBinding, artifact: str) -> None:
    """Check that a testbench instantiates the DUT module."""
    if not re.search(rf"^\s*{re.escape(dut.module_name)}\s*#\s*\(", text, re.MULTILINE):
        raise ConsistencyError(
            f"{artifact} does not instantiate {dut.module_name}",
            artifact=artifact,
            module=dut.module_name,
        )


def check_bundle(
    module_text: str,
    testbench_text: str,
    verification_text: str | None,
    derived: DerivedParameters,
    dut: DutBinding,
) -> None:
    """Check a module, its testbench and optional verification text.

    Raises:
        ConsistencyError: If any artifact disagrees with ``derived``
    """
    check_text(module_text, derived, "module", MODULE_REQUIRED)
    if not re.search(rf"^module\s+{re.escape(dut.module_name)}\b", module_text, re.MULTILINE):
        raise ConsistencyError(
            f"module text does not declare {dut.module_name}",
            artifact="module",
            module=dut.module_name,
        )

    check_text(testbench_text, derived, "testbench", BENCH_REQUIRED)
    check_instantiates(testbench_text, dut, "testbench")

    if verification_text is not None:
        check_text(verification_text, derived, "verification", BENCH_REQUIRED)
        check_instantiates(verification_text, dut, "verification")

    log.debug("Bundle for %s is consistent", dut.module_name)
