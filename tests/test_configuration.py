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

"""Tests for the configuration model and its construction-time validation."""

import dataclasses

import pytest

from ramgen.configuration import (
    BurstPolicy,
    BusInterface,
    FeatureSet,
    InterfaceProfile,
    MemoryArchitecture,
    MemorySizeClass,
    RamGeometry,
    VerificationMethodology,
)
from ramgen.exceptions import ConfigurationError


@pytest.mark.parametrize(
    "size_class, address_width, depth",
    [
        ("8GB", 27, 134217728),
        ("16GB", 28, 268435456),
        ("32GB", 29, 536870912),
    ],
)
def test_size_class_geometry(size_class, address_width, depth):
    geometry = RamGeometry.from_size_class(size_class)
    assert geometry.data_width == 64
    assert geometry.address_width == address_width
    assert geometry.depth == depth
    assert geometry.label == size_class
    assert not geometry.custom


def test_size_class_accepts_enum_member():
    geometry = RamGeometry.from_size_class(MemorySizeClass.MEDIUM)
    assert geometry.size_class is MemorySizeClass.MEDIUM


def test_unknown_size_class_rejected():
    with pytest.raises(ConfigurationError):
        RamGeometry.from_size_class("64GB")


def test_custom_geometry_label_and_suffix():
    geometry = RamGeometry.custom_geometry(10, size_class="16GB")
    assert geometry.depth == 1024
    assert geometry.label == "16GB_a10"
    assert geometry.module_suffix == "16gb_a10"


@pytest.mark.parametrize("address_width", [3, 31, 0])
def test_address_width_out_of_range(address_width):
    with pytest.raises(ConfigurationError) as excinfo:
        RamGeometry.custom_geometry(address_width)
    assert excinfo.value.context["value"] == address_width


@pytest.mark.parametrize("data_width", [4, 48, 100])
def test_data_width_must_be_power_of_two(data_width):
    with pytest.raises(ConfigurationError):
        RamGeometry.custom_geometry(10, data_width=data_width)


def test_geometry_is_immutable(small_geometry):
    with pytest.raises(dataclasses.FrozenInstanceError):
        small_geometry.address_width = 12


def test_feature_set_defaults():
    features = FeatureSet()
    assert features.bus_interface is BusInterface.SIMPLE
    assert features.memory_architecture is MemoryArchitecture.STANDARD
    assert features.test_methodology is VerificationMethodology.DIRECTED
    assert features.burst_policy is BurstPolicy.NONE
    assert features.pipeline_stages == 1
    assert features.assertions_enabled
    assert not features.needs_verification_env


def test_feature_set_coerces_string_values():
    features = FeatureSet(bus_interface="axi4", burst_policy="wrap", test_methodology="uvm")
    assert features.bus_interface is BusInterface.AXI4
    assert features.burst_policy is BurstPolicy.WRAPPING
    assert features.test_methodology is VerificationMethodology.VERIFICATION_ENV


@pytest.mark.parametrize(
    "overrides",
    [
        {"pipeline_stages": 0},
        {"pipeline_stages": 7},
        {"clock_domain_count": 0},
        {"clock_domain_count": 5},
        {"bus_interface": "pcie"},
        {"memory_architecture": "cam"},
        {"test_methodology": "formal"},
        {"burst_policy": "random"},
        {"ecc_enabled": 1},
        {"pipeline_stages": True},
        {"initialization_source": ""},
    ],
)
def test_invalid_feature_set_rejected(overrides):
    with pytest.raises(ConfigurationError):
        FeatureSet(**overrides)


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        FeatureSet(pipeline_stages=7)


def test_invalid_enum_lists_valid_values():
    with pytest.raises(ConfigurationError) as excinfo:
        FeatureSet(bus_interface="pcie")
    assert "axi4" in excinfo.value.context["valid_values"]
    assert "bus_interface" in str(excinfo.value)


def test_verification_env_triggers():
    assert FeatureSet(test_methodology="uvm").needs_verification_env
    assert FeatureSet(verification_env_compliant=True).needs_verification_env
    assert not FeatureSet(test_methodology="coverage").needs_verification_env


def test_presets():
    small = FeatureSet.preset("8GB")
    assert small.bus_interface is BusInterface.SIMPLE
    assert small.memory_architecture is MemoryArchitecture.STANDARD

    medium = FeatureSet.preset("16GB")
    assert medium.bus_interface is BusInterface.AXI4
    assert medium.memory_architecture is MemoryArchitecture.ECC
    assert medium.ecc_enabled

    large = FeatureSet.preset("32GB")
    assert large.memory_architecture is MemoryArchitecture.DUAL_PORT
    assert large.clock_domain_count == 2
    assert large.needs_verification_env


def test_interface_profile_presets():
    assert InterfaceProfile.preset("8GB").interface_width == 64
    medium = InterfaceProfile.preset("16GB")
    assert medium.interface_width == 128
    assert medium.burst_length == 8
    assert InterfaceProfile.preset("32GB").power_domain_count == 4


@pytest.mark.parametrize(
    "overrides",
    [
        {"interface_width": 96},
        {"burst_length": 0},
        {"burst_length": 257},
        {"read_latency": 0},
        {"power_domain_count": 0},
        {"clock_gating": "yes"},
    ],
)
def test_invalid_interface_profile_rejected(overrides):
    values = {"interface_width": 64, "burst_length": 1, "read_latency": 1, "write_latency": 1}
    values.update(overrides)
    with pytest.raises(ConfigurationError):
        InterfaceProfile(**values)
