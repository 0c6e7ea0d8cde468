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

"""Generation session: current configuration, bundle and simulator."""

import logging

from ramgen.configuration import (
    FeatureSet,
    GeneratedBundle,
    InterfaceProfile,
    MemorySizeClass,
    RamGeometry,
)
from ramgen.generator import generate_bundle
from ramgen.models.memory_model import MemorySimulator

log = logging.getLogger(__name__)


class RamGeneratorSession:
    """Holds the active configuration and what was produced from it.

    Every ``configure`` call builds a new bundle and a new simulator; the
    previous simulator (and its storage and log) is discarded, never reused.

    Attributes:
        geometry: Active geometry
        features: Active feature set
        profile: Custom interface profile, or None for the preset
        bundle: Bundle generated for the active configuration
        simulator: Behavioral simulator for the active geometry
    """

    def __init__(
        self,
        geometry: RamGeometry | None = None,
        features: FeatureSet | None = None,
        profile: InterfaceProfile | None = None,
    ) -> None:
        self.configure(
            geometry or RamGeometry.from_size_class(MemorySizeClass.SMALL),
            features or FeatureSet(),
            profile,
        )

    @classmethod
    def from_preset(cls, size_class: MemorySizeClass | str) -> "RamGeneratorSession":
        """Start a session on a size class with its shipped feature preset."""
        return cls(RamGeometry.from_size_class(size_class), FeatureSet.preset(size_class))

    def configure(
        self,
        geometry: RamGeometry,
        features: FeatureSet,
        profile: InterfaceProfile | None = None,
    ) -> GeneratedBundle:
        """Switch to a new configuration.

        The bundle is generated before any state changes, so a failing
        configuration leaves the session as it was.

        Returns:
            The newly generated bundle
        """
        bundle = generate_bundle(geometry, features, profile)
        self.geometry = geometry
        self.features = features
        self.profile = profile
        self.bundle = bundle
        self.simulator = MemorySimulator(geometry)
        log.info("Session configured for %s", bundle.module_name)
        return bundle
