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

"""Shared fixtures for the ramgen unit tests.

Most tests use a reduced geometry (address width 10, depth 1024) so that
rendered text stays small and addresses are easy to reason about; the
preset geometries are only used where the size class itself is under test.
"""

import pytest

from ramgen.configuration import FeatureSet, RamGeometry
from ramgen.generators.parameters import derive


@pytest.fixture
def small_geometry() -> RamGeometry:
    """8GB profile with a 10-bit address (1024 words)."""
    return RamGeometry.custom_geometry(10)


@pytest.fixture
def narrow_geometry() -> RamGeometry:
    """8-bit words, 16 entries: the smallest legal geometry."""
    return RamGeometry.custom_geometry(4, data_width=8)


@pytest.fixture
def default_features() -> FeatureSet:
    return FeatureSet()


@pytest.fixture
def small_params(small_geometry, default_features):
    return derive(small_geometry, default_features)
