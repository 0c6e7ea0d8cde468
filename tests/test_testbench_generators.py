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

"""Tests for the four testbench renderers and their DUT bindings."""

import pytest

from ramgen.configuration import DutBinding, FeatureSet, PortStyle, StructuralGeneratorId
from ramgen.generators.consistency import extract_parameters
from ramgen.generators.dispatch import dut_binding
from ramgen.generators.parameters import derive
from ramgen.generators.testbenches import (
    bench_module_name,
    render_coverage,
    render_directed,
    render_randomized,
    render_verification_env,
    timeout_cycles,
)

ALL_RENDERERS = [render_directed, render_coverage, render_randomized, render_verification_env]


def bind(generator, geometry, features):
    return dut_binding(generator, geometry, features)


@pytest.fixture
def std_dut(small_geometry):
    return bind(StructuralGeneratorId.STANDARD, small_geometry, FeatureSet())


def test_bench_module_name():
    dut = DutBinding("std_ram_8gb")
    assert bench_module_name(dut) == "std_ram_8gb_tb"
    assert bench_module_name(dut, "uvm_tb") == "std_ram_8gb_uvm_tb"


def test_timeout_covers_latency(small_params):
    assert timeout_cycles(small_params) == 1 + 1 + 1 + 16


@pytest.mark.parametrize("renderer", ALL_RENDERERS)
def test_bench_declares_parameters_and_instantiates_dut(
    renderer, small_geometry, small_params, std_dut
):
    text = renderer(small_geometry, small_params, FeatureSet(), std_dut)
    params = extract_parameters(text)
    assert set(params["DATA_WIDTH"]) == {64}
    assert set(params["ADDR_WIDTH"]) == {10}
    assert set(params["DEPTH"]) == {1024}
    assert "    std_ram_8gb_a10 #(" in text
    assert ".DEPTH(DEPTH)" in text


@pytest.mark.parametrize("renderer", ALL_RENDERERS)
def test_bench_macro_blocks_keep_indentation(renderer, small_geometry, small_params, std_dut):
    text = renderer(small_geometry, small_params, FeatureSet(), std_dut)
    for line in ("localparam DATA_WIDTH", "reg                  rst_n", "std_ram_8gb_a10 #("):
        assert f"\n{line}" not in text
    assert "\n    localparam DATA_WIDTH     = 64;\n" in text
    assert "\n    reg                  rst_n = 1'b0;\n" in text
    assert "\n    task automatic apply_reset();\n" in text


def test_directed_uses_canonical_vectors(small_geometry, small_params, std_dut):
    text = render_directed(small_geometry, small_params, FeatureSet(), std_dut)
    assert "module std_ram_8gb_a10_tb;" in text
    assert "dut_write(10'h000, 64'h00000000deadbeef);" in text
    assert "dut_write(10'h001, 64'h00000000cafebabe);" in text
    assert "dut_write(10'h200, 64'h123456789abcdef0);" in text
    assert "check_read(10'h3ff, 64'hffffffffffffffff);" in text
    assert "PASS: directed test passed" in text
    assert "localparam TIMEOUT_CYCLES = 19;" in text


def test_coverage_bins(small_geometry, small_params, std_dut):
    text = render_coverage(small_geometry, small_params, FeatureSet(), std_dut)
    assert "covergroup ram_cg;" in text
    assert "bins low = {[10'h000:10'h154]};" in text
    assert "bins mid = {[10'h155:10'h2a9]};" in text
    assert "bins high = {[10'h2aa:10'h3ff]};" in text
    assert "bins all_ones  = {64'hffffffffffffffff};" in text
    assert "64'h8000000000000000" in text
    assert "addr_x_op: cross cp_addr, cp_op;" in text
    assert "cg.get_coverage()" in text


def test_randomized_stimulus(small_geometry, small_params, std_dut):
    text = render_randomized(small_geometry, small_params, FeatureSet(), std_dut)
    assert "localparam ITERATIONS = 10000;" in text
    assert "class ram_stimulus;" in text
    assert "OP_IDLE  := 10," in text
    assert "OP_READ  := 45," in text
    assert "OP_WRITE := 45" in text
    assert "shadow.exists(stim.addr)" in text


def test_verification_env_components(small_geometry, small_params, std_dut):
    text = render_verification_env(small_geometry, small_params, FeatureSet(), std_dut)
    assert "interface ram_if (input bit clk);" in text
    assert "package ram_uvm_pkg;" in text
    for component in (
        "class ram_transaction extends uvm_sequence_item;",
        "class ram_sequence extends uvm_sequence #(ram_transaction);",
        "class ram_driver extends uvm_driver #(ram_transaction);",
        "class ram_monitor extends uvm_monitor;",
        "class ram_scoreboard extends uvm_scoreboard;",
        "class ram_agent extends uvm_agent;",
        "class ram_env extends uvm_env;",
        "class ram_test extends uvm_test;",
    ):
        assert component in text
    assert "module std_ram_8gb_a10_uvm_tb;" in text
    assert 'run_test("ram_test");' in text
    assert "localparam SEQUENCE_LENGTH = 100;" in text
    assert ".clk(vif.clk)" in text


def test_axi_binding(small_geometry):
    features = FeatureSet(bus_interface="axi4")
    params = derive(small_geometry, features)
    dut = bind(StructuralGeneratorId.AXI4, small_geometry, features)
    assert dut.port_style is PortStyle.AXI4

    text = render_directed(small_geometry, params, features, dut)
    assert ".aclk(clk)," in text
    assert ".aresetn(rst_n)," in text
    assert ".s_axi_rready(s_axi_rready)" in text
    assert "localparam [2:0] AXI_SIZE = 3'b011;" in text
    assert "s_axi_wstrb[DATA_WIDTH/8-1:0] = '1;" in text
    assert "ID_WIDTH" in extract_parameters(text)


def test_dual_port_binding_shared_clock(small_geometry):
    features = FeatureSet(memory_architecture="dual_port")
    params = derive(small_geometry, features)
    dut = bind(StructuralGeneratorId.DUAL_PORT, small_geometry, features)

    text = render_directed(small_geometry, params, features, dut)
    assert ".clk(clk)," in text
    assert ".we_a(we_a)," in text
    assert ".data_out_b(data_out_b)," in text
    assert ".collision_detected()," in text
    assert "Port A drives every access" in text


def test_dual_port_binding_independent_clocks(small_geometry):
    features = FeatureSet(memory_architecture="dual_port", clock_domain_count=2)
    params = derive(small_geometry, features)
    dut = bind(StructuralGeneratorId.DUAL_PORT, small_geometry, features)

    text = render_randomized(small_geometry, params, features, dut)
    assert ".clk_a(clk)," in text
    assert ".clk_b(clk)," in text
    assert ".rst_n_b(rst_n)," in text


def test_bench_follows_custom_latency(small_geometry):
    features = FeatureSet(memory_architecture="pipelined", pipeline_stages=5)
    params = derive(small_geometry, features)
    dut = bind(StructuralGeneratorId.PIPELINED, small_geometry, features)
    text = render_directed(small_geometry, params, features, dut)
    assert "localparam TIMEOUT_CYCLES = 23;" in text
