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

"""Reference model of the single-error-correcting ECC used by the ECC RAM.

ECC Model
=========

The generated ECC module stores ``ceil(log2(data_width + 1))`` check bits
next to every data word (7 for 64-bit data). Each data bit is assigned a
distinct odd-weight column of the parity-check matrix, so:

    syndrome == 0                  -> clean
    syndrome has odd weight        -> single data-bit error, correctable
                                      (the syndrome equals the faulty bit's column)
    syndrome non-zero, even weight -> double error, uncorrectable

The XOR of two odd-weight columns always has even weight and is never zero,
so a double error can never be mistaken for a single one. With r check bits
there are exactly 2^(r-1) odd-weight columns, which is exactly data_width for
the power-of-two widths the generator supports.

Limitation: there are no spare columns for the check bits themselves, so a
single flip in a stored check bit looks like a flip of the data bit whose
column is that weight-1 vector and is miscorrected.

The RTL generator renders its encode masks and correction table from an
``EccCode`` instance, so the model and the emitted Verilog cannot drift.

Usage:
    code = EccCode(64)
    check = code.encode(0xDEADBEEF)
    result = code.decode(0xDEADBEEF ^ (1 << 5), check)
    assert result.status is EccStatus.CORRECTED and result.data == 0xDEADBEEF
"""

from enum import Enum
from typing import NamedTuple

from ramgen.exceptions import ConfigurationError
from ramgen.ram_types import CheckBits, DataWord, Syndrome
from ramgen.utils.memory_utils import mask_to_width


def ecc_check_width(data_width: int) -> int:
    """Number of check bits for a data width: ceil(log2(data_width + 1)).

    Examples:
        >>> ecc_check_width(64)
        7
        >>> ecc_check_width(8)
        4
    """
    return data_width.bit_length()


class EccStatus(Enum):
    CLEAN = "clean"
    CORRECTED = "corrected"
    UNCORRECTABLE = "uncorrectable"


class EccDecodeResult(NamedTuple):
    """Result of decoding one stored word.

    Attributes:
        data: Corrected data for CLEAN/CORRECTED, raw data for UNCORRECTABLE
        status: Error classification
        syndrome: Stored check bits XOR recomputed check bits
        bit_index: Index of the corrected data bit, or None
    """

    data: int
    status: EccStatus
    syndrome: int
    bit_index: int | None = None


class EccCode:
    """Odd-weight-column SEC-DED style code over a power-of-two data width.

    Attributes:
        data_width: Protected word width in bits
        check_width: Number of check bits
        columns: Parity-check column for each data bit (index = bit)
        check_masks: For each check bit, the data bits it covers
    """

    def __init__(self, data_width: int) -> None:
        self.data_width = data_width
        self.check_width = ecc_check_width(data_width)

        # Odd-weight vectors, lightest first, so low data bits get the
        # cheapest parity trees.
        odd = sorted(
            (v for v in range(1, 1 << self.check_width) if v.bit_count() % 2),
            key=lambda v: (v.bit_count(), v),
        )
        if len(odd) < data_width:
            raise ConfigurationError(
                "Not enough odd-weight ECC columns for data width",
                data_width=data_width,
                check_width=self.check_width,
                available=len(odd),
            )
        self.columns: tuple[int, ...] = tuple(odd[:data_width])
        self._bit_for_syndrome = {column: bit for bit, column in enumerate(self.columns)}

        masks = [0] * self.check_width
        for bit, column in enumerate(self.columns):
            for j in range(self.check_width):
                if column >> j & 1:
                    masks[j] |= 1 << bit
        self.check_masks: tuple[int, ...] = tuple(masks)

    def encode(self, data: int) -> CheckBits:
        """Compute check bits for a data word."""
        data = mask_to_width(data, self.data_width)
        check = 0
        for j, mask in enumerate(self.check_masks):
            check |= ((data & mask).bit_count() & 1) << j
        return CheckBits(check)

    def syndrome(self, data: int, stored_check: int) -> Syndrome:
        """Stored check bits XOR check bits recomputed from ``data``."""
        return Syndrome(self.encode(data) ^ mask_to_width(stored_check, self.check_width))

    def decode(self, data: int, stored_check: int) -> EccDecodeResult:
        """Classify and, where possible, correct a stored word.

        Args:
            data: Data word as read from storage
            stored_check: Check bits as read from storage

        Returns:
            EccDecodeResult; uncorrectable words are returned unmodified
        """
        data = mask_to_width(data, self.data_width)
        syndrome = self.syndrome(data, stored_check)
        if syndrome == 0:
            return EccDecodeResult(DataWord(data), EccStatus.CLEAN, syndrome)

        bit = self._bit_for_syndrome.get(syndrome) if syndrome.bit_count() % 2 else None
        if bit is None:
            return EccDecodeResult(DataWord(data), EccStatus.UNCORRECTABLE, syndrome)
        return EccDecodeResult(
            DataWord(data ^ (1 << bit)), EccStatus.CORRECTED, syndrome, bit
        )

    def correction_table(self) -> list[tuple[int, int]]:
        """(syndrome, data flip mask) pairs for every correctable syndrome.

        Ordered by data bit index; used to render the RTL correction case.
        """
        return [(column, 1 << bit) for bit, column in enumerate(self.columns)]
