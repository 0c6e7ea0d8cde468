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

"""Pin-level drivers for the generated RAM port styles.

RAM Interface
=============

One driver class per port style. Every driver follows the same timing
discipline as the generated SystemVerilog testbenches:

    1. Inputs change on the falling edge
    2. The DUT samples them on the following rising edge
    3. Registered outputs are read back on the next falling edge

Waiting for a handshake is bounded by ``timeout`` falling edges; running
out raises ``TimeoutError`` instead of hanging the simulation.

    SimpleRamInterface     we/re/addr/data_in -> data_out/ready
                           (standard, ECC and pipelined modules)
    DualPortRamInterface   two simple ports on one shared clock
    AxiRamInterface        AXI4 slave: AW/W/B and AR/R channels, bursts

Usage:
    ram = SimpleRamInterface(dut)
    await ram.start_clock()
    await ram.reset()
    await ram.write(0x10, 0xDEADBEEF)
    value = await ram.read(0x10)
"""

from typing import Any, NamedTuple

import cocotb
from cocotb.clock import Clock
from cocotb.triggers import FallingEdge, RisingEdge

from ramgen.config import (
    AXI_BURST_FIXED,
    AXI_BURST_INCR,
    AXI_BURST_WRAP,
    CLOCK_PERIOD_NS,
    RESET_CYCLES,
    TIMEOUT_MARGIN_CYCLES,
)
from ramgen.generators.structural import axi_size_code
from ramgen.utils.memory_utils import mask_to_width, width_mask


async def wait_for_high(clock: Any, signal: Any, timeout: int, what: str) -> None:
    """Wait (sampling on falling edges) until ``signal`` reads 1."""
    for _ in range(timeout):
        if str(signal.value) == "1":
            return
        await FallingEdge(clock)
    raise TimeoutError(f"timeout after {timeout} cycles waiting for {what}")


class SimpleRamInterface:
    """Driver for modules with a single we/re port.

    Attributes:
        dut: cocotb DUT handle
        clock: Clock signal handle
        reset_n: Active-low reset handle
        timeout: Falling edges to wait for ``ready``
    """

    def __init__(self, dut: Any, timeout: int = TIMEOUT_MARGIN_CYCLES + 8) -> None:
        self.dut = dut
        self.clock = dut.clk
        self.reset_n = dut.rst_n
        self.timeout = timeout

    async def start_clock(self) -> None:
        cocotb.start_soon(Clock(self.clock, CLOCK_PERIOD_NS, unit="ns").start())
        await FallingEdge(self.clock)

    def drive_idle(self) -> None:
        self.dut.we.value = 0
        self.dut.re.value = 0
        self.dut.addr.value = 0
        self.dut.data_in.value = 0

    async def reset(self, cycles: int = RESET_CYCLES) -> None:
        """Hold reset for ``cycles`` rising edges, release on a falling edge."""
        self.drive_idle()
        self.reset_n.value = 0
        for _ in range(cycles):
            await RisingEdge(self.clock)
        await FallingEdge(self.clock)
        self.reset_n.value = 1

    async def issue(self, write: bool, read: bool, address: int, data: int = 0) -> None:
        """Present one request for exactly one rising edge."""
        self.dut.we.value = int(write)
        self.dut.re.value = int(read)
        self.dut.addr.value = address
        self.dut.data_in.value = data
        await FallingEdge(self.clock)
        self.dut.we.value = 0
        self.dut.re.value = 0

    async def write(self, address: int, data: int) -> None:
        await self.issue(True, False, address, data)
        await wait_for_high(self.clock, self.dut.ready, self.timeout, "write ready")

    async def read(self, address: int) -> int:
        await self.issue(False, True, address)
        await wait_for_high(self.clock, self.dut.ready, self.timeout, "read ready")
        return int(self.dut.data_out.value)

    async def idle(self, cycles: int = 1) -> None:
        for _ in range(cycles):
            await FallingEdge(self.clock)


class DualPortOutputs(NamedTuple):
    """Registered dual-port outputs sampled after one rising edge."""

    ready_a: bool
    ready_b: bool
    data_out_a: Any
    data_out_b: Any
    collision: bool
    collision_addr: int


class DualPortRamInterface:
    """Driver for the shared-clock dual-port module."""

    def __init__(self, dut: Any) -> None:
        self.dut = dut
        self.clock = dut.clk
        self.reset_n = dut.rst_n

    async def start_clock(self) -> None:
        cocotb.start_soon(Clock(self.clock, CLOCK_PERIOD_NS, unit="ns").start())
        await FallingEdge(self.clock)

    def _drive_port(self, suffix: str, write: bool, read: bool, address: int, data: int) -> None:
        getattr(self.dut, f"we{suffix}").value = int(write)
        getattr(self.dut, f"re{suffix}").value = int(read)
        getattr(self.dut, f"addr{suffix}").value = address
        getattr(self.dut, f"data_in{suffix}").value = data

    def drive_idle(self) -> None:
        self._drive_port("_a", False, False, 0, 0)
        self._drive_port("_b", False, False, 0, 0)

    async def reset(self, cycles: int = RESET_CYCLES) -> None:
        self.drive_idle()
        self.reset_n.value = 0
        for _ in range(cycles):
            await RisingEdge(self.clock)
        await FallingEdge(self.clock)
        self.reset_n.value = 1

    async def cycle(self, port_a: tuple, port_b: tuple) -> DualPortOutputs:
        """Drive both ports for one edge and sample the registered outputs.

        Args:
            port_a: (write, read, address, data) for port A
            port_b: (write, read, address, data) for port B

        Returns:
            DualPortOutputs; data_out values are raw cocotb values and may
            be unresolved when never-written words are read
        """
        self._drive_port("_a", *port_a)
        self._drive_port("_b", *port_b)
        await FallingEdge(self.clock)
        self.drive_idle()
        return DualPortOutputs(
            ready_a=bool(int(self.dut.ready_a.value)),
            ready_b=bool(int(self.dut.ready_b.value)),
            data_out_a=self.dut.data_out_a.value,
            data_out_b=self.dut.data_out_b.value,
            collision=bool(int(self.dut.collision_detected.value)),
            collision_addr=int(self.dut.collision_addr.value),
        )


class AxiBeat(NamedTuple):
    """One read-data beat."""

    data: int
    resp: int
    last: bool


def next_burst_address(address: int, length: int, burst: int, address_width: int) -> int:
    """Address of the beat after ``address`` (``length`` is AxLEN).

    Examples:
        >>> next_burst_address(6, 3, AXI_BURST_WRAP, 10)
        7
        >>> next_burst_address(7, 3, AXI_BURST_WRAP, 10)
        4
    """
    if burst == AXI_BURST_FIXED:
        return address
    if burst == AXI_BURST_WRAP:
        return (address & ~length) | ((address + 1) & length)
    return mask_to_width(address + 1, address_width)


def burst_addresses(address: int, length: int, burst: int, address_width: int) -> list[int]:
    """Every beat address of a burst of ``length + 1`` beats."""
    addresses = [address]
    for _ in range(length):
        addresses.append(next_burst_address(addresses[-1], length, burst, address_width))
    return addresses


class AxiRamInterface:
    """Driver for the AXI4 slave module.

    Attributes:
        data_width: Memory word width (low bits of each beat)
        interface_width: Bus width
    """

    def __init__(
        self,
        dut: Any,
        data_width: int,
        interface_width: int,
        timeout: int = TIMEOUT_MARGIN_CYCLES + 8,
    ) -> None:
        self.dut = dut
        self.clock = dut.aclk
        self.reset_n = dut.aresetn
        self.data_width = data_width
        self.interface_width = interface_width
        self.timeout = timeout
        self.size_code = axi_size_code(data_width)

    async def start_clock(self) -> None:
        cocotb.start_soon(Clock(self.clock, CLOCK_PERIOD_NS, unit="ns").start())
        await FallingEdge(self.clock)

    def drive_idle(self) -> None:
        for name in (
            "awid", "awaddr", "awlen", "awvalid",
            "wdata", "wstrb", "wlast", "wvalid", "bready",
            "arid", "araddr", "arlen", "arvalid", "rready",
        ):
            getattr(self.dut, f"s_axi_{name}").value = 0
        self.dut.s_axi_awsize.value = self.size_code
        self.dut.s_axi_arsize.value = self.size_code
        self.dut.s_axi_awburst.value = AXI_BURST_INCR
        self.dut.s_axi_arburst.value = AXI_BURST_INCR

    async def reset(self, cycles: int = RESET_CYCLES) -> None:
        self.drive_idle()
        self.reset_n.value = 0
        for _ in range(cycles):
            await RisingEdge(self.clock)
        await FallingEdge(self.clock)
        self.reset_n.value = 1

    async def _handshake(self, valid: Any, ready: Any, what: str) -> None:
        """Hold ``valid`` until a rising edge sees ``ready``, then drop it."""
        valid.value = 1
        await wait_for_high(self.clock, ready, self.timeout, what)
        await FallingEdge(self.clock)
        valid.value = 0

    async def write_burst(
        self,
        address: int,
        beats: list[int],
        burst: int = AXI_BURST_INCR,
        strobe: int | None = None,
        transaction_id: int = 0,
    ) -> int:
        """Write ``len(beats)`` words as one burst.

        Args:
            address: Start word address
            beats: Data word per beat
            burst: AWBURST encoding
            strobe: WSTRB for every beat (default: all memory-word lanes)
            transaction_id: AWID, echoed on BID

        Returns:
            BRESP
        """
        if strobe is None:
            strobe = width_mask(self.data_width // 8)
        dut = self.dut
        dut.s_axi_awid.value = transaction_id
        dut.s_axi_awaddr.value = address
        dut.s_axi_awlen.value = len(beats) - 1
        dut.s_axi_awsize.value = self.size_code
        dut.s_axi_awburst.value = burst
        await self._handshake(dut.s_axi_awvalid, dut.s_axi_awready, "AWREADY")

        for index, data in enumerate(beats):
            dut.s_axi_wdata.value = mask_to_width(data, self.data_width)
            dut.s_axi_wstrb.value = strobe
            dut.s_axi_wlast.value = int(index == len(beats) - 1)
            await self._handshake(dut.s_axi_wvalid, dut.s_axi_wready, "WREADY")
        dut.s_axi_wlast.value = 0

        dut.s_axi_bready.value = 1
        await wait_for_high(self.clock, dut.s_axi_bvalid, self.timeout, "BVALID")
        resp = int(dut.s_axi_bresp.value)
        assert int(dut.s_axi_bid.value) == transaction_id, "BID does not echo AWID"
        await FallingEdge(self.clock)
        dut.s_axi_bready.value = 0
        return resp

    async def read_burst(
        self,
        address: int,
        length: int,
        burst: int = AXI_BURST_INCR,
        transaction_id: int = 0,
    ) -> list[AxiBeat]:
        """Read a burst of ``length`` beats.

        Beats answered with an error carry data 0.
        """
        dut = self.dut
        dut.s_axi_arid.value = transaction_id
        dut.s_axi_araddr.value = address
        dut.s_axi_arlen.value = length - 1
        dut.s_axi_arsize.value = self.size_code
        dut.s_axi_arburst.value = burst
        await self._handshake(dut.s_axi_arvalid, dut.s_axi_arready, "ARREADY")

        beats: list[AxiBeat] = []
        dut.s_axi_rready.value = 1
        while True:
            await wait_for_high(self.clock, dut.s_axi_rvalid, self.timeout, "RVALID")
            beat = AxiBeat(
                data=mask_to_width(int(dut.s_axi_rdata.value), self.data_width),
                resp=int(dut.s_axi_rresp.value),
                last=bool(int(dut.s_axi_rlast.value)),
            )
            assert int(dut.s_axi_rid.value) == transaction_id, "RID does not echo ARID"
            beats.append(beat)
            await FallingEdge(self.clock)
            if beat.last:
                break
        dut.s_axi_rready.value = 0
        return beats
