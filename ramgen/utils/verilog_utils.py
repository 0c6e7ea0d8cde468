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

"""Verilog literal formatting helpers (registered as template filters)."""

__all__ = ["sv_hex", "sv_bin", "sv_string"]


def sv_hex(value: int, bits: int) -> str:
    """Format a sized hexadecimal literal.

    Examples:
        >>> sv_hex(0xDEADBEEF, 64)
        "64'h00000000deadbeef"
        >>> sv_hex(5, 7)
        "7'h05"
    """
    width = (bits + 3) // 4
    return f"{bits}'h{value:0{width}x}"


def sv_bin(value: int, bits: int) -> str:
    """Format a sized binary literal.

    Examples:
        >>> sv_bin(1, 2)
        "2'b01"
    """
    return f"{bits}'b{value:0{bits}b}"


def sv_string(text: str) -> str:
    """Quote a string for a Verilog string literal ($readmemh file names)."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
