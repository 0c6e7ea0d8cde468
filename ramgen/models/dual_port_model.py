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

"""Cycle-level reference model of the dual-port RAM.

Both ports are evaluated on the same edge. Reads observe the storage as it
was before the edge (read-before-write). When both ports touch the same
address the collision flag is raised; when both of them *write* it, neither
write is applied.
"""

from typing import NamedTuple

from ramgen.configuration import RamGeometry
from ramgen.ram_types import Address, DataWord
from ramgen.utils.memory_utils import is_address_in_range, mask_to_width


class PortRequest(NamedTuple):
    """One port's inputs for a single clock edge."""

    write_enable: bool = False
    read_enable: bool = False
    address: int = 0
    data: int = 0

    @property
    def active(self) -> bool:
        return self.write_enable or self.read_enable


IDLE = PortRequest()


class DualPortCycleResult(NamedTuple):
    """Registered outputs after one edge.

    Attributes:
        read_data_a: Value read on port A (None if no read or never written)
        read_data_b: Value read on port B
        ready_a: Port A issued an in-range access
        ready_b: Port B issued an in-range access
        collision: Both ports accessed the same address
        collision_address: Address of the collision, or None
        write_hazard: Both ports wrote the same address (both suppressed)
    """

    read_data_a: int | None
    read_data_b: int | None
    ready_a: bool
    ready_b: bool
    collision: bool
    collision_address: int | None
    write_hazard: bool


class DualPortMemoryModel:
    """Two ports over one sparse storage array."""

    def __init__(self, geometry: RamGeometry) -> None:
        self.geometry = geometry
        self.ram_words: dict[Address, DataWord] = {}

    def cycle(
        self, port_a: PortRequest = IDLE, port_b: PortRequest = IDLE
    ) -> DualPortCycleResult:
        """Apply one clock edge to both ports.

        Args:
            port_a: Port A request
            port_b: Port B request

        Returns:
            DualPortCycleResult describing the registered outputs
        """
        depth = self.geometry.depth
        collision = port_a.active and port_b.active and port_a.address == port_b.address
        write_hazard = collision and port_a.write_enable and port_b.write_enable

        in_range_a = is_address_in_range(port_a.address, depth)
        in_range_b = is_address_in_range(port_b.address, depth)

        read_a = self._read(port_a) if port_a.read_enable and in_range_a else None
        read_b = self._read(port_b) if port_b.read_enable and in_range_b else None

        if not write_hazard:
            for port, in_range in ((port_a, in_range_a), (port_b, in_range_b)):
                if port.write_enable and in_range:
                    self.ram_words[Address(port.address)] = DataWord(
                        mask_to_width(port.data, self.geometry.data_width)
                    )

        return DualPortCycleResult(
            read_data_a=read_a,
            read_data_b=read_b,
            ready_a=port_a.active and in_range_a,
            ready_b=port_b.active and in_range_b,
            collision=collision,
            collision_address=port_a.address if collision else None,
            write_hazard=write_hazard,
        )

    def peek(self, address: int) -> int | None:
        """Return stored data without simulating a port access."""
        return self.ram_words.get(Address(address))

    def reset(self) -> None:
        self.ram_words.clear()

    def _read(self, port: PortRequest) -> int | None:
        return self.ram_words.get(Address(port.address))
