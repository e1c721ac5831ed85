# This file is part of Checkbox.
#
# Copyright 2026 Canonical Ltd.
#
# Checkbox is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3,
# as published by the Free Software Foundation.
#
# Checkbox is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with Checkbox.  If not, see <http://www.gnu.org/licenses/>.

"""
:mod:`cpuid_decoder.lib.bit` -- bit field helpers for 32-bit register words
===========================================================================

Bit 0 is the least significant bit of a register word.
"""

WORD_MASK = 0xffffffff


def bit_field(value, start, width):
    """
    Extract ``width`` bits of ``value`` starting at bit ``start``.

    ``width`` may be as large as 32 (the whole word).
    """
    if width <= 0:
        return 0
    return (value >> start) & ((1 << width) - 1)


def bit_value(value, low, high):
    """
    Extract the inclusive bit range ``[high:low]`` of ``value``.

    This mirrors the ``[high:low]`` notation used by the vendor manuals,
    e.g. ``bit_value(eax, 8, 11)`` is the base family of leaf 1.
    """
    return bit_field(value, low, high - low + 1)


def test_bit(bit, value):
    return (value >> bit) & 1


def ceil_log2(count):
    """
    Number of bits needed to encode ``count`` distinct values.

    ``ceil_log2(1)`` is 0; counts of 0 are treated as 1.
    """
    if count <= 1:
        return 0
    return (count - 1).bit_length()


def word_bytes(*words):
    """
    Return the little-endian byte string of the given 32-bit words.
    """
    return b"".join(
        (word & WORD_MASK).to_bytes(4, "little") for word in words)
