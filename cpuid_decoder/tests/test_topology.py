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
cpuid_decoder.tests.test_topology
=================================

Tests for cpuid_decoder.topology module
"""

import unittest

from cpuid_decoder.stash import build_stash
from cpuid_decoder.tests.dumps import (
    AMD,
    HYGON,
    INTEL,
    make_leaf_dump,
)
from cpuid_decoder.topology import NO_MP, ApicWidths, MpInfo

HTT = 1 << 28

# Leaf 0xb/0x1f levels of a 4 core, 2 thread package
SMT_LEVEL = (1, 2, 0x100, 0)
CORE_LEVEL = (4, 8, 0x201, 0)
END_LEVEL = (0, 0, 0x002, 0)


def topology(dump):
    stash = build_stash(dump)
    return stash.mp, stash.widths


class IntelTopologyTests(unittest.TestCase):

    def test_leaf_b(self):
        mp, widths = topology(make_leaf_dump(
            INTEL, 0x000306a9, ebx1=0x00100800, edx1=HTT, max_basic=0xd,
            leaves={
                (4, 0): (0x1c004121, 0, 0, 0),
                (0xb, 0): SMT_LEVEL,
                (0xb, 1): CORE_LEVEL,
                (0xb, 2): END_LEVEL,
            }))
        self.assertEqual(mp, MpInfo("Intel leaf 0xb", 4, 2))
        self.assertEqual(widths, ApicWidths(1, 3, None, 4))

    def test_leaf_1f_wins_over_leaf_b(self):
        mp, widths = topology(make_leaf_dump(
            INTEL, 0x000906ea, edx1=HTT, max_basic=0x1f, leaves={
                (0xb, 0): SMT_LEVEL,
                (0xb, 1): CORE_LEVEL,
                (0xb, 2): END_LEVEL,
                (0x1f, 0): (1, 2, 0x100, 0),
                (0x1f, 1): (5, 16, 0x201, 0),
                (0x1f, 2): END_LEVEL,
            }))
        self.assertEqual(mp, MpInfo("Intel leaf 0x1f", 8, 2))
        self.assertEqual(widths, ApicWidths(1, 4, None, 5))

    def test_incomplete_leaf_1f_falls_back(self):
        mp, _ = topology(make_leaf_dump(
            INTEL, 0x000906ea, edx1=HTT, max_basic=0x1f, leaves={
                (0xb, 0): SMT_LEVEL,
                (0xb, 1): CORE_LEVEL,
                (0xb, 2): END_LEVEL,
                (0x1f, 0): (1, 2, 0x100, 0),
                (0x1f, 1): END_LEVEL,
            }))
        self.assertEqual(mp.method, "Intel leaf 0xb")

    def test_leaf_4(self):
        mp, widths = topology(make_leaf_dump(
            INTEL, 0x000206a7, ebx1=0x00080000, edx1=HTT, max_basic=0xa,
            leaves={(4, 0): (0x0c004121, 0, 0, 0)}))
        self.assertEqual(mp, MpInfo("Intel leaf 1/4", 4, 2))
        self.assertEqual(widths, ApicWidths(1, 2, None, 3))

    def test_leaf_1(self):
        mp, widths = topology(make_leaf_dump(
            INTEL, 0x00000f29, ebx1=0x00020000, edx1=HTT, max_basic=2))
        self.assertEqual(mp, MpInfo("Intel leaf 1", 1, 2))
        self.assertEqual(widths, ApicWidths(1, 0, None, 1))

    def test_no_htt(self):
        mp, widths = topology(make_leaf_dump(
            INTEL, 0x00000686, ebx1=0x00020000))
        self.assertEqual(mp, NO_MP)
        self.assertIsNone(widths)


class AmdTopologyTests(unittest.TestCase):

    def test_leaf_8000001e(self):
        mp, widths = topology(make_leaf_dump(
            AMD, 0x00870f10, ebx1=0x00100800, edx1=HTT, max_basic=0x10,
            leaves={
                (0x80000008, 0): (0x3030, 0, 0x400f, 0),
                (0x8000001e, 0): (0, 0x100, 0, 0),
            }))
        self.assertEqual(mp, MpInfo("AMD leaf 0x8000001e", 8, 2))
        self.assertEqual(widths, ApicWidths(1, 3, None, 4))

    def test_leaf_8000001e_without_htt(self):
        mp, widths = topology(make_leaf_dump(
            AMD, 0x00870f10, ebx1=0x00100800, max_basic=0x10,
            leaves={
                (0x80000008, 0): (0x3030, 0, 0x400f, 0),
                (0x8000001e, 0): (0, 0x100, 0, 0),
            }))
        self.assertEqual(mp, NO_MP)
        self.assertIsNone(widths)

    def test_hygon_prefix(self):
        mp, _ = topology(make_leaf_dump(
            HYGON, 0x00900f01, ebx1=0x00100800, edx1=HTT, max_basic=0xd,
            leaves={
                (0x80000008, 0): (0x3030, 0, 0x400f, 0),
                (0x8000001e, 0): (0, 0x100, 0, 0),
            }))
        self.assertEqual(mp.method, "Hygon leaf 0x8000001e")

    def test_leaf_80000008_before_family_17(self):
        # Athlon 64 X2 reporting its cores as logical processors
        mp, widths = topology(make_leaf_dump(
            AMD, 0x00040fb2, ebx1=0x00020000, edx1=HTT, leaves={
                (0x80000001, 0): (0x00040fb2, 0, 0x2, 0),
                (0x80000008, 0): (0x3030, 0, 0x1, 0),
                (0x8000001e, 0): (0, 0x100, 0, 0),
            }))
        self.assertEqual(mp, MpInfo("AMD leaf 1/0x80000008", 2, 1))
        self.assertEqual(widths, ApicWidths(0, 1, None, 1))

    def test_compute_units(self):
        # Bulldozer: 8 cores in 4 compute units
        mp, widths = topology(make_leaf_dump(
            AMD, 0x00600f12, ebx1=0x00080000, edx1=HTT, max_basic=0xd,
            leaves={
                (0x80000001, 0): (0x00600f12, 0, 0x2, 0),
                (0x80000008, 0): (0x3030, 0, 0x4007, 0),
                (0x8000001e, 0): (0, 0x100, 0, 0),
            }))
        self.assertEqual(mp, MpInfo("AMD leaf 1/0x80000008", 8, 1))
        self.assertEqual(widths.compute_unit, 1)
        self.assertEqual(widths.core, 4)

    def test_leaf_1_fallback(self):
        mp, _ = topology(make_leaf_dump(
            AMD, 0x00000f48, ebx1=0x00020000, edx1=HTT))
        self.assertEqual(mp, MpInfo("AMD leaf 1", 1, 2))


class OtherVendorTopologyTests(unittest.TestCase):

    def test_vendor_prefix(self):
        mp, _ = topology(make_leaf_dump(
            "CentaurHauls", 0x000006f2, ebx1=0x00020000, edx1=HTT))
        self.assertEqual(mp.method, "VIA leaf 1")

    def test_unknown_vendor_prefix(self):
        mp, _ = topology(make_leaf_dump(
            "MiSTer AO486", 0x00000f29, ebx1=0x00020000, edx1=HTT))
        self.assertEqual(mp.method, "generic leaf 1")

    def test_no_leaf_1(self):
        mp, widths = topology(make_leaf_dump(INTEL, 0, max_basic=0))
        self.assertEqual(mp, NO_MP)
        self.assertIsNone(widths)
