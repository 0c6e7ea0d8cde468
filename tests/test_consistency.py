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

"""Tests for the consistency checker, including deliberately broken texts."""

import re

import pytest

from ramgen.configuration import FeatureSet
from ramgen.exceptions import ConsistencyError
from ramgen.generator import generate_bundle
from ramgen.generators.consistency import (
    check_bundle,
    check_instantiates,
    check_text,
    expected_values,
    extract_parameters,
)


@pytest.fixture
def bundle(small_geometry):
    return generate_bundle(small_geometry, FeatureSet(verification_env_compliant=True))


def check(bundle, module_text=None, testbench_text=None, verification_text=None):
    check_bundle(
        module_text if module_text is not None else bundle.module_text,
        testbench_text if testbench_text is not None else bundle.testbench_text,
        verification_text if verification_text is not None else bundle.verification_text,
        bundle.parameters,
        bundle.dut,
    )


def test_generated_bundle_is_consistent(bundle):
    check(bundle)


def test_extract_parameters_forms():
    text = """
    parameter DATA_WIDTH = 64,
    localparam ADDR_WIDTH = 10;
    localparam int unsigned DEPTH = 1024;
    parameter int IF_WIDTH=64)
    localparam [1:0] BURST_FIXED = 2'b00;
    parameter BURST_TYPE = 2'b01
    """
    assert extract_parameters(text) == {
        "DATA_WIDTH": [64],
        "ADDR_WIDTH": [10],
        "DEPTH": [1024],
        "IF_WIDTH": [64],
    }


def test_expected_values(small_params):
    values = expected_values(small_params)
    assert values["DEPTH"] == 1024
    assert values["ECC_WIDTH"] == 7
    assert values["PIPE_STAGES"] == 1


def test_tampered_module_depth(bundle):
    tampered = re.sub(r"(parameter DEPTH\s*=\s*)1024", r"\g<1>2048", bundle.module_text)
    with pytest.raises(ConsistencyError) as excinfo:
        check(bundle, module_text=tampered)
    assert excinfo.value.parameter == "DEPTH"
    assert excinfo.value.expected_value == 1024
    assert excinfo.value.actual_value == 2048
    assert excinfo.value.context["artifact"] == "module"


def test_tampered_testbench_width(bundle):
    tampered = bundle.testbench_text.replace(
        "localparam DATA_WIDTH     = 64;", "localparam DATA_WIDTH     = 32;"
    )
    with pytest.raises(ConsistencyError) as excinfo:
        check(bundle, testbench_text=tampered)
    assert excinfo.value.parameter == "DATA_WIDTH"
    assert excinfo.value.context["artifact"] == "testbench"


def test_tampered_verification_address_width(bundle):
    tampered = bundle.verification_text.replace(
        "localparam ADDR_WIDTH     = 10;", "localparam ADDR_WIDTH     = 11;", 1
    )
    with pytest.raises(ConsistencyError) as excinfo:
        check(bundle, verification_text=tampered)
    assert excinfo.value.context["artifact"] == "verification"


def test_missing_required_parameter(small_params):
    with pytest.raises(ConsistencyError) as excinfo:
        check_text("parameter DATA_WIDTH = 64,\n", small_params, "module", ("DATA_WIDTH", "DEPTH"))
    assert excinfo.value.parameter == "DEPTH"


def test_unrelated_parameters_ignored(small_params):
    check_text(
        "parameter DEPTH = 1024;\nlocalparam CLOCK_PERIOD = 10;\n",
        small_params,
        "testbench",
        ("DEPTH",),
    )


def test_testbench_must_instantiate_dut(bundle):
    renamed = bundle.testbench_text.replace(bundle.module_name + " #(", "other_ram #(")
    with pytest.raises(ConsistencyError):
        check(bundle, testbench_text=renamed)
    with pytest.raises(ConsistencyError):
        check_instantiates(renamed, bundle.dut, "testbench")


def test_module_must_declare_its_name(bundle):
    renamed = bundle.module_text.replace(f"module {bundle.module_name} #(", "module other_ram #(")
    with pytest.raises(ConsistencyError):
        check(bundle, module_text=renamed)
