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

"""Memory address, masking and test-vector helpers.

Memory Utils
============

This module provides the small numeric helpers shared by the behavioral
simulator and the testbench renderers:
- Width masking and address range checks
- Canonical directed-test vectors (scaled to the configured depth)
- Coverage buckets over the address range and canonical data patterns

Both the simulator's basic test and the generated directed testbench use
``canonical_test_vectors`` so they exercise the same addresses and values.
"""

from ramgen.config import CANONICAL_TEST_VALUES


def width_mask(bits: int) -> int:
    """Return an all-ones mask of the given width.

    Examples:
        >>> hex(width_mask(8))
        '0xff'
    """
    return (1 << bits) - 1


def mask_to_width(value: int, bits: int) -> int:
    """Truncate a value to its low ``bits`` bits (two's complement for negatives).

    Examples:
        >>> hex(mask_to_width(0x1_2345_6789, 32))
        '0x23456789'
        >>> hex(mask_to_width(-1, 8))
        '0xff'
    """
    return value & width_mask(bits)


def is_address_in_range(address: int, depth: int) -> bool:
    """Check that a word address lies in [0, depth)."""
    return 0 <= address < depth


def format_hex(value: int) -> str:
    """Format an integer as unpadded uppercase hex, keeping the sign.

    Examples:
        >>> format_hex(0xDEADBEEF)
        '0xDEADBEEF'
        >>> format_hex(-1)
        '-0x1'
    """
    if value < 0:
        return f"-0x{-value:X}"
    return f"0x{value:X}"


def canonical_test_addresses(depth: int) -> tuple[int, ...]:
    """Return the canonical directed-test addresses for a memory depth.

    First word, second word, midpoint and last word, so both address
    boundaries and the top address bit are exercised.

    Examples:
        >>> canonical_test_addresses(1024)
        (0, 1, 512, 1023)
    """
    return (0, 1, depth // 2, depth - 1)


def canonical_test_vectors(depth: int, data_width: int) -> list[tuple[int, int]]:
    """Return (address, value) pairs for directed write/read checks.

    Values are masked to the data width, so narrow custom geometries still
    get distinct, legal values.
    """
    return [
        (address, mask_to_width(value, data_width))
        for address, value in zip(canonical_test_addresses(depth), CANONICAL_TEST_VALUES)
    ]


def address_buckets(depth: int) -> dict[str, tuple[int, int]]:
    """Split [0, depth) into low/mid/high thirds (inclusive bounds).

    Examples:
        >>> address_buckets(16)
        {'low': (0, 4), 'mid': (5, 9), 'high': (10, 15)}
    """
    first = depth // 3
    second = (2 * depth) // 3
    return {
        "low": (0, first - 1),
        "mid": (first, second - 1),
        "high": (second, depth - 1),
    }


def data_patterns(data_width: int) -> dict[str, list[int]]:
    """Return the canonical data patterns for coverage.

    Returns:
        Mapping with "all_zeros", "all_ones" and "walking_ones" (one value
        per bit position)
    """
    return {
        "all_zeros": [0],
        "all_ones": [width_mask(data_width)],
        "walking_ones": [1 << bit for bit in range(data_width)],
    }
