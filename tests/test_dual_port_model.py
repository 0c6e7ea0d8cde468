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

"""Tests for the dual-port cycle model."""

import pytest

from ramgen.models.dual_port_model import IDLE, DualPortMemoryModel, PortRequest


@pytest.fixture
def model(small_geometry) -> DualPortMemoryModel:
    return DualPortMemoryModel(small_geometry)


def write(address, data):
    return PortRequest(write_enable=True, address=address, data=data)


def read(address):
    return PortRequest(read_enable=True, address=address)


def test_independent_writes_both_applied(model):
    result = model.cycle(write(1, 0xAA), write(2, 0xBB))
    assert result.ready_a and result.ready_b
    assert not result.collision
    assert result.collision_address is None
    assert model.peek(1) == 0xAA
    assert model.peek(2) == 0xBB


def test_parallel_reads(model):
    model.cycle(write(1, 0x11), write(2, 0x22))
    result = model.cycle(read(2), read(1))
    assert (result.read_data_a, result.read_data_b) == (0x22, 0x11)


def test_same_address_write_suppressed(model):
    model.cycle(write(5, 0x55))
    result = model.cycle(write(5, 0x1), write(5, 0x2))

    assert result.collision
    assert result.write_hazard
    assert result.collision_address == 5
    assert model.peek(5) == 0x55


def test_read_write_collision_reads_old_value(model):
    model.cycle(write(9, 0x99))
    result = model.cycle(read(9), write(9, 0x100))

    assert result.collision
    assert not result.write_hazard
    assert result.read_data_a == 0x99
    assert model.peek(9) == 0x100


def test_idle_port_never_collides(model):
    result = model.cycle(write(0, 1), IDLE)
    assert not result.collision
    assert not result.ready_b


def test_out_of_range_access_ignored(model, small_geometry):
    result = model.cycle(write(small_geometry.depth, 1), read(small_geometry.depth))
    assert not result.ready_a
    assert not result.ready_b
    assert result.read_data_b is None
    assert model.ram_words == {}


def test_write_data_masked(narrow_geometry):
    model = DualPortMemoryModel(narrow_geometry)
    model.cycle(write(0, 0x1FF))
    assert model.peek(0) == 0xFF


def test_reset(model):
    model.cycle(write(0, 1))
    model.reset()
    assert model.peek(0) is None
