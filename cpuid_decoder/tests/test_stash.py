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
cpuid_decoder.tests.test_stash
==============================

Tests for cpuid_decoder.stash module
"""

import unittest

from cpuid_decoder.leaves import LeafDump
from cpuid_decoder.stash import StashBuilder, build_stash
from cpuid_decoder.tests.dumps import (
    AMD,
    INTEL,
    make_leaf_dump,
    text_words,
)
from cpuid_decoder.vendor import Vendor

IVY_BRIDGE_BRAND = "Intel(R) Core(TM) i7-3770 CPU @ 3.40GHz"


class StashBuildTests(unittest.TestCase):

    def test_frozen_after_build(self):
        stash = build_stash(make_leaf_dump(INTEL, 0x000306a9))
        self.assertTrue(stash.frozen)
        with self.assertRaises(AttributeError):
            stash.brand = "Intel(R) Xeon(R)"

    def test_flags_frozen_after_build(self):
        stash = build_stash(make_leaf_dump(INTEL, 0x000306a9))
        with self.assertRaises(AttributeError):
            stash.cache.l3 = True
        with self.assertRaises(AttributeError):
            stash.br.xeon = True
        self.assertFalse(stash.cache.l3)
        self.assertFalse(stash.br.xeon)

    def test_raw_leaves(self):
        stash = build_stash(make_leaf_dump(
            INTEL, 0x000306a9, ebx1=0x00100800, edx1=0xbfebfbff,
            brand=IVY_BRIDGE_BRAND))
        self.assertIs(stash.vendor, Vendor.INTEL)
        self.assertEqual(stash.key.synth_model, 0x3a)
        self.assertTrue(stash.saw_1)
        self.assertEqual(stash.val_1_ebx, 0x00100800)
        self.assertEqual(stash.brand, IVY_BRIDGE_BRAND)
        self.assertTrue(stash.br.core)

    def test_brand_leaves_are_cleaned(self):
        stash = build_stash(make_leaf_dump(
            INTEL, 0x00000f29, brand="      Intel(R) Pentium(R) 4 CPU"))
        self.assertEqual(stash.brand, "Intel(R) Pentium(R) 4 CPU")

    def test_leaf_above_basic_limit_is_ignored(self):
        dump = make_leaf_dump(INTEL, 0x000306a9, max_basic=1, leaves={
            (4, 0): (0x1c004121, 0, 0, 0),
        })
        stash = build_stash(dump)
        self.assertFalse(stash.saw_4)

    def test_garbage_extended_limit(self):
        # Parts without extended leaves echo the basic leaves back
        dump = make_leaf_dump(INTEL, 0x00000633, brand="Pentium II",
                              leaves={(0x80000000, 0): (0x2, 0, 0, 0)})
        stash = build_stash(dump)
        self.assertEqual(stash.brand, "")
        self.assertFalse(stash.saw_80000001)

    def test_missing_leaf_0_means_no_limit(self):
        dump = LeafDump({(1, 0): (0x000306a9, 0, 0, 0),
                         (4, 0): (0x0c004121, 0, 0, 0)})
        stash = build_stash(dump)
        self.assertIs(stash.vendor, Vendor.UNKNOWN)
        self.assertEqual(stash.key.synth_model, 0x3a)
        self.assertTrue(stash.saw_4)

    def test_empty_dump(self):
        stash = build_stash(LeafDump())
        self.assertIs(stash.vendor, Vendor.UNKNOWN)
        self.assertFalse(stash.saw_1)
        self.assertEqual(stash.key.to_eax(), 0)
        self.assertEqual(stash.effective_brand, "")

    def test_transmeta_signature_from_extended_leaf(self):
        dump = make_leaf_dump("GenuineTMx86", 0x00000543, leaves={
            (0x80000001, 0): (0x00000542, 0, 0, 0),
        })
        stash = build_stash(dump)
        self.assertEqual(stash.key.stepping, 2)

    def test_topology_levels_stop_at_type_0(self):
        dump = make_leaf_dump(INTEL, 0x000306a9, max_basic=0xb, leaves={
            (0xb, 0): (1, 2, 0x100, 0),
            (0xb, 1): (4, 8, 0x201, 0),
            (0xb, 2): (0, 0, 0x002, 0),
            (0xb, 3): (9, 9, 0x303, 0),
        })
        stash = build_stash(dump)
        self.assertTrue(stash.saw_b)
        self.assertEqual(len(stash.val_b_levels), 2)
        self.assertFalse(stash.saw_1f)

    def test_hypervisor(self):
        stash = build_stash(make_leaf_dump(
            INTEL, 0x000306a9, hypervisor="KVMKVMKVM"))
        self.assertEqual(stash.hypervisor, "KVMKVMKVM")

    def test_leaf_lookup(self):
        builder = StashBuilder(make_leaf_dump(AMD, 0x00870f10, leaves={
            (0x80000008, 0): (0x3030, 0, 0x400f, 0),
        }))
        self.assertIsNotNone(builder.leaf(0x80000008))
        self.assertIsNone(builder.leaf(0x8000001e))
        self.assertIsNone(builder.leaf(2))


class BrandStageTests(unittest.TestCase):

    def test_amd_override_brand(self):
        stash = build_stash(make_leaf_dump(
            AMD, 0x00000f48, ebx1=0x2a, brand="AMD Processor model unknown"))
        self.assertEqual(stash.brand, "AMD Processor model unknown")
        self.assertEqual(stash.override_brand,
                         "AMD Athlon(tm) 64 Processor 3200+")
        self.assertEqual(stash.effective_brand,
                         "AMD Athlon(tm) 64 Processor 3200+")
        self.assertTrue(stash.br.athlon)

    def test_intel_brand_index(self):
        stash = build_stash(make_leaf_dump(INTEL, 0x00000686, ebx1=0x02))
        self.assertEqual(stash.brand, "")
        self.assertTrue(stash.br.pentium)
        self.assertEqual(stash.br.pentium_tier, "III")

    def test_brand_string_wins_over_index(self):
        stash = build_stash(make_leaf_dump(
            INTEL, 0x00000686, ebx1=0x02, brand="Intel(R) Celeron(R)"))
        self.assertTrue(stash.br.celeron)
        self.assertFalse(stash.br.pentium)


class TextWordsTests(unittest.TestCase):

    def test_vendor_words(self):
        self.assertEqual(text_words("GenuineIntel", 3),
                         [0x756e6547, 0x49656e69, 0x6c65746e])
