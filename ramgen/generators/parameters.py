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

"""Parameter derivation.

Parameter Deriver
=================

``derive`` is the single place where the numbers used by every generator
and renderer are computed. Generators never invent a width, depth or
latency of their own; they read it from the returned ``DerivedParameters``,
which is what keeps a module and its testbench in agreement.

Rules:
    depth                = 2 ** address_width
    ecc_redundancy_width = ceil(log2(data_width + 1))
    interface profile    = preset row for the geometry's size class, or the
                           caller's profile carried through unchanged
    pipeline_stages      = FeatureSet.pipeline_stages
"""

import logging

from ramgen.configuration import (
    DerivedParameters,
    FeatureSet,
    InterfaceProfile,
    RamGeometry,
)
from ramgen.exceptions import ConfigurationError
from ramgen.models.ecc_model import ecc_check_width

log = logging.getLogger(__name__)


def derive(
    geometry: RamGeometry,
    features: FeatureSet,
    profile: InterfaceProfile | None = None,
) -> DerivedParameters:
    """Compute derived parameters for a configuration.

    Args:
        geometry: Memory geometry
        features: Validated feature set
        profile: Custom interface profile, or None for the size-class preset

    Returns:
        Frozen DerivedParameters

    Raises:
        ConfigurationError: If the interface is narrower than a memory word
    """
    if profile is None:
        profile = InterfaceProfile.preset(geometry.size_class)

    if profile.interface_width < geometry.data_width:
        raise ConfigurationError(
            "interface_width must be at least data_width",
            interface_width=profile.interface_width,
            data_width=geometry.data_width,
        )

    params = DerivedParameters(
        data_width=geometry.data_width,
        address_width=geometry.address_width,
        depth=geometry.depth,
        interface_width=profile.interface_width,
        burst_length=profile.burst_length,
        ecc_redundancy_width=ecc_check_width(geometry.data_width),
        read_latency=profile.read_latency,
        write_latency=profile.write_latency,
        power_domain_count=profile.power_domain_count,
        low_power_mode=profile.low_power_mode,
        clock_gating=profile.clock_gating,
        pipeline_stages=features.pipeline_stages,
    )
    log.debug("Derived parameters for %s: %s", geometry.label, params)
    return params
