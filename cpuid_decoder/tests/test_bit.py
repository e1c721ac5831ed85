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
cpuid_decoder.tests.test_bit
============================

Tests for cpuid_decoder.lib.bit module
"""

import unittest

from cpuid_decoder.lib import bit
from cpuid_decoder.lib.bit import (
    bit_field,
    bit_value,
    ceil_log2,
    word_bytes,
)


class BitFieldTests(unittest.TestCase):

    def test_matches_shift_and_mask(self):
        samples = [
            (0x000306a9, 0, 4),
            (0x000306a9, 4, 4),
            (0x000306a9, 16, 4),
            (0x00a20f10, 20, 8),
            (0xdeadbeef, 3, 13),
            (0xffffffff, 31, 1),
        ]
        for value, start, width in samples:
            self.assertEqual(bit_field(value, start, width),
                             (value >> start) & ((1 << width) - 1))

    def test_full_word(self):
        self.assertEqual(bit_field(0xffffffff, 0, 32), 0xffffffff)
        self.assertEqual(bit_field(0x80000000, 0, 32), 0x80000000)

    def test_zero_width(self):
        self.assertEqual(bit_field(0xffffffff, 4, 0), 0)

    def test_bit_value_is_inclusive(self):
        # Leaf 1 EAX of an Ivy Bridge
        eax = 0x000306a9
        self.assertEqual(bit_value(eax, 0, 3), 0x9)
        self.assertEqual(bit_value(eax, 4, 7), 0xa)
        self.assertEqual(bit_value(eax, 8, 11), 0x6)
        self.assertEqual(bit_value(eax, 16, 19), 0x3)
        self.assertEqual(bit_value(eax, 20, 27), 0x0)
        self.assertEqual(bit_value(eax, 0, 31), eax)


class BitHelpersTests(unittest.TestCase):

    def test_test_bit(self):
        self.assertEqual(bit.test_bit(28, 0xbfebfbff), 1)
        self.assertEqual(bit.test_bit(28, 0x078bfbff), 0)

    def test_ceil_log2(self):
        self.assertEqual(ceil_log2(0), 0)
        self.assertEqual(ceil_log2(1), 0)
        self.assertEqual(ceil_log2(2), 1)
        self.assertEqual(ceil_log2(3), 2)
        self.assertEqual(ceil_log2(8), 3)
        self.assertEqual(ceil_log2(16), 4)
        self.assertEqual(ceil_log2(17), 5)

    def test_word_bytes(self):
        self.assertEqual(word_bytes(0x756e6547, 0x49656e69, 0x6c65746e),
                         b"GenuineIntel")

    def test_word_bytes_masks_to_32_bits(self):
        self.assertEqual(word_bytes(0x100000041), b"A\x00\x00\x00")
