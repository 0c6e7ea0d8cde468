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

"""Tests for the pipelined RAM cycle model."""

import pytest

from ramgen.exceptions import ConfigurationError
from ramgen.models.pipeline_model import PipelinedMemoryModel


@pytest.mark.parametrize("stages", [0, 6])
def test_stage_count_validated(small_geometry, stages):
    with pytest.raises(ConfigurationError):
        PipelinedMemoryModel(small_geometry, stages)


@pytest.mark.parametrize("stages", [1, 2, 5])
def test_valid_after_latency(small_geometry, stages):
    model = PipelinedMemoryModel(small_geometry, stages)
    assert model.latency == stages + 1

    outputs = [model.clock(write_enable=True, address=3, data=0x55)]
    outputs += model.flush()

    assert [out.valid for out in outputs] == [False] * stages + [True]
    assert model.ram_words[3] == 0x55
    assert model.cycles == stages + 1


def test_back_to_back_write_then_read(small_geometry):
    model = PipelinedMemoryModel(small_geometry, 2)
    outputs = [
        model.clock(write_enable=True, address=7, data=0xABCD),
        model.clock(read_enable=True, address=7),
    ]
    outputs += model.flush()

    assert [out.valid for out in outputs] == [False, False, True, True]
    assert outputs[-1].data_out == 0xABCD


def test_storage_untouched_until_final_stage(small_geometry):
    model = PipelinedMemoryModel(small_geometry, 3)
    model.clock(write_enable=True, address=1, data=1)
    model.clock()
    model.clock()
    assert 1 not in model.ram_words
    model.clock()
    assert model.ram_words[1] == 1


def test_data_out_holds_between_reads(small_geometry):
    model = PipelinedMemoryModel(small_geometry, 1)
    model.clock(write_enable=True, address=2, data=0x22)
    model.clock(read_enable=True, address=2)
    out = model.clock()
    assert out == (True, 0x22)

    idle = model.clock()
    assert not idle.valid
    assert idle.data_out == 0x22


def test_out_of_range_never_valid(small_geometry):
    model = PipelinedMemoryModel(small_geometry, 2)
    outputs = [model.clock(write_enable=True, address=small_geometry.depth, data=1)]
    outputs += model.flush()
    assert not any(out.valid for out in outputs)
    assert model.ram_words == {}


def test_reset_clears_chain_but_keeps_storage(small_geometry):
    model = PipelinedMemoryModel(small_geometry, 2)
    model.clock(write_enable=True, address=4, data=0x44)
    model.flush()

    model.clock(write_enable=True, address=5, data=0x55)
    model.reset()
    outputs = model.flush()

    assert not any(out.valid for out in outputs)
    assert model.ram_words == {4: 0x44}
    assert model.cycles == 2
