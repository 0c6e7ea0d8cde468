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

"""Tests for the generation session."""

import pytest

from ramgen import (
    ConfigurationError,
    FeatureSet,
    InterfaceProfile,
    RamGeneratorSession,
    RamGeometry,
)
from ramgen.configuration import StructuralGeneratorId


def test_default_session():
    session = RamGeneratorSession()
    assert session.bundle.module_name == "std_ram_8gb"
    assert session.simulator.depth == 2**27
    assert session.profile is None


def test_from_preset():
    session = RamGeneratorSession.from_preset("16GB")
    assert session.bundle.structural_generator is StructuralGeneratorId.AXI4
    assert session.simulator.depth == 2**28


def test_configure_replaces_simulator(small_geometry):
    session = RamGeneratorSession(small_geometry)
    first = session.simulator
    first.write(1, 0x11)

    bundle = session.configure(small_geometry, FeatureSet(memory_architecture="ecc"))

    assert bundle is session.bundle
    assert bundle.module_name == "ecc_ram_8gb_a10"
    assert session.simulator is not first
    assert session.simulator.get_logs() == []
    assert session.simulator.read(1).value is None


def test_configure_switches_geometry(small_geometry):
    session = RamGeneratorSession(small_geometry)
    larger = RamGeometry.custom_geometry(12)
    session.configure(larger, FeatureSet())
    assert session.geometry == larger
    assert session.simulator.depth == 4096


def test_failed_configure_keeps_previous_state(small_geometry):
    session = RamGeneratorSession(small_geometry)
    bundle = session.bundle
    simulator = session.simulator

    narrow = InterfaceProfile(interface_width=32, burst_length=1, read_latency=1, write_latency=1)
    with pytest.raises(ConfigurationError):
        session.configure(small_geometry, FeatureSet(), narrow)

    assert session.bundle is bundle
    assert session.simulator is simulator
    assert session.profile is None
