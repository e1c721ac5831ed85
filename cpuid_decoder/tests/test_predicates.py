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
cpuid_decoder.tests.test_predicates
===================================

Tests for cpuid_decoder.predicates module
"""

import unittest

from cpuid_decoder import predicates
from cpuid_decoder.brand import BrandStringAnalyzer
from cpuid_decoder.stash import Stash
from cpuid_decoder.vendor import Vendor


def stash_for(vendor, brand="", l2_size_kb=0):
    stash = Stash()
    stash.vendor = vendor
    stash.brand = brand
    stash.br = BrandStringAnalyzer(vendor).analyze(brand)
    stash.cache.l2_size_kb = l2_size_kb
    return stash


class CompositionTests(unittest.TestCase):

    def setUp(self):
        self.yes = predicates.Predicate("yes", lambda stash: True)
        self.no = predicates.Predicate("no", lambda stash: False)

    def test_and(self):
        self.assertTrue((self.yes & self.yes)(None))
        self.assertFalse((self.yes & self.no)(None))

    def test_or(self):
        self.assertTrue((self.no | self.yes)(None))
        self.assertFalse((self.no | self.no)(None))

    def test_invert(self):
        self.assertFalse((~self.yes)(None))
        self.assertTrue((~self.no)(None))

    def test_names(self):
        self.assertEqual((self.yes & ~self.no).name, "(yes & ~no)")

    def test_result_is_bool(self):
        truthy = predicates.Predicate("truthy", lambda stash: "text")
        self.assertIs(truthy(None), True)

    def test_decorator(self):
        @predicates.predicate("vortex")
        def vortex(stash):
            return stash.vendor is Vendor.VORTEX

        self.assertIsInstance(vortex, predicates.Predicate)
        self.assertEqual(vortex.name, "vortex")
        self.assertTrue(vortex(stash_for(Vendor.VORTEX)))


class IntelPredicateTests(unittest.TestCase):

    def test_desktop_core(self):
        stash = stash_for(
            Vendor.INTEL, "Intel(R) Core(TM) i7-3770 CPU @ 3.40GHz")
        self.assertTrue(predicates.desktop_core(stash))
        self.assertFalse(predicates.mobile_core(stash))
        self.assertFalse(predicates.intel_xeon(stash))

    def test_mobile_from_u_line(self):
        stash = stash_for(
            Vendor.INTEL, "Intel(R) Core(TM) i5-8250U CPU @ 1.60GHz")
        self.assertTrue(predicates.mobile_core(stash))
        self.assertTrue(predicates.intel_i_8000(stash))

    def test_desktop_celeron_excludes_pentium(self):
        stash = stash_for(Vendor.INTEL, "Intel(R) Celeron(R) CPU G1610")
        self.assertTrue(predicates.desktop_celeron(stash))
        self.assertFalse(predicates.desktop_pentium(stash))

    def test_vendor_guard(self):
        # Same brand words on another vendor never count
        stash = stash_for(Vendor.AMD, "Intel(R) Xeon(R) CPU E3-1230 V2")
        self.assertFalse(predicates.intel_xeon(stash))

    def test_l2_geometry(self):
        self.assertTrue(predicates.p6_celeron(stash_for(Vendor.INTEL)))
        self.assertTrue(predicates.no_l2(stash_for(Vendor.INTEL)))
        self.assertTrue(predicates.p6_celeron(
            stash_for(Vendor.INTEL, l2_size_kb=128)))


class AmdPredicateTests(unittest.TestCase):

    def test_opteron_core_counts(self):
        stash = stash_for(
            Vendor.AMD, "Quad-Core AMD Opteron(tm) Processor 2374 HE")
        self.assertTrue(predicates.quad_core_opteron(stash))
        self.assertFalse(predicates.dual_core_opteron(stash))

    def test_numeric_core_count(self):
        stash = stash_for(
            Vendor.AMD, "AMD FX(tm)-8350 Eight-Core Processor")
        self.assertTrue(predicates.eight_core(stash))
        self.assertTrue(predicates.amd_fx(stash))

    def test_ryzen(self):
        stash = stash_for(
            Vendor.AMD, "AMD Ryzen 7 PRO 4750U with Radeon Graphics")
        self.assertTrue(predicates.amd_ryzen(stash))
        self.assertFalse(predicates.amd_epyc(stash))

    def test_cache_size(self):
        self.assertTrue(predicates.k7_duron_l2(
            stash_for(Vendor.AMD, l2_size_kb=64)))
        self.assertTrue(predicates.amd_small_l2(
            stash_for(Vendor.AMD, l2_size_kb=256)))
        self.assertFalse(predicates.amd_small_l2(stash_for(Vendor.AMD)))

    def test_missing_brand_reads_false(self):
        stash = stash_for(Vendor.AMD)
        self.assertFalse(predicates.amd_athlon_fx(stash))
        self.assertFalse(predicates.mobile_sempron(stash))


class HygonPredicateTests(unittest.TestCase):

    def test_server_line(self):
        self.assertTrue(predicates.hygon_server(
            stash_for(Vendor.HYGON, "Hygon C86 7185 32-core Processor")))
        self.assertFalse(predicates.hygon_server(
            stash_for(Vendor.HYGON, "Hygon C86 3185  8-core Processor")))
        self.assertFalse(predicates.hygon_server(
            stash_for(Vendor.AMD, "Hygon C86 7185 32-core Processor")))


class ViaPredicateTests(unittest.TestCase):

    def test_brand_words(self):
        self.assertTrue(predicates.via_nano(
            stash_for(Vendor.VIA, "VIA Nano processor U2250")))
        self.assertFalse(predicates.via_eden(
            stash_for(Vendor.VIA, "VIA Nano processor U2250")))
        self.assertFalse(predicates.via_nano(
            stash_for(Vendor.ZHAOXIN, "VIA Nano processor U2250")))

    def test_reads_brand_flags(self):
        stash = Stash()
        stash.vendor = Vendor.VIA
        stash.br.nano = True
        self.assertTrue(predicates.via_nano(stash))
        self.assertFalse(predicates.via_c7_m(stash))
