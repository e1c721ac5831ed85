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
cpuid_decoder.tests.test_signature
==================================

Tests for cpuid_decoder.signature and cpuid_decoder.vendor modules
"""

import unittest

from cpuid_decoder.signature import SignatureKey
from cpuid_decoder.vendor import (
    Vendor,
    hypervisor_name,
    hypervisor_string,
    vendor_from_string,
    vendor_name,
    vendor_string,
)


class SignatureKeyTests(unittest.TestCase):

    def test_fields_of_ivy_bridge(self):
        key = SignatureKey.from_eax(0x000306a9)
        self.assertEqual(key, SignatureKey(0, 6, 3, 10, 9))
        self.assertEqual(key.synth_family, 0x6)
        self.assertEqual(key.synth_model, 0x3a)

    def test_extended_family_is_added(self):
        # Zen 2 Matisse
        key = SignatureKey.from_eax(0x00870f10)
        self.assertEqual(key.extended_family, 8)
        self.assertEqual(key.family, 0xf)
        self.assertEqual(key.synth_family, 0x17)
        self.assertEqual(key.synth_model, 0x71)
        self.assertEqual(key.stepping, 0)

    def test_views(self):
        key = SignatureKey.from_fields(8, 15, 7, 1, 0)
        self.assertEqual(key.family_view, (0x17,))
        self.assertEqual(key.family_model_view, (0x17, 0x71))
        self.assertEqual(key.family_model_stepping_view, (0x17, 0x71, 0))
        self.assertEqual(key.legacy_family_view, (15,))
        self.assertEqual(key.legacy_family_model_view, (15, 1))
        self.assertEqual(key.legacy_family_model_stepping_view, (15, 1, 0))

    def test_to_eax(self):
        for eax in (0x000306a9, 0x00870f10, 0x00000f48, 0x00a20f12):
            self.assertEqual(SignatureKey.from_eax(eax).to_eax(), eax)

    def test_reserved_bits_are_ignored(self):
        self.assertEqual(SignatureKey.from_eax(0xf000f6a9),
                         SignatureKey.from_eax(0x000006a9))

    def test_str(self):
        self.assertEqual(str(SignatureKey.from_eax(0x000306a9)),
                         "family 0x6, model 0x3a, stepping 0x9")


class VendorTests(unittest.TestCase):

    def test_vendor_string_order(self):
        # EBX, EDX, ECX
        self.assertEqual(
            vendor_string(0x756e6547, 0x6c65746e, 0x49656e69),
            "GenuineIntel")
        self.assertEqual(
            vendor_string(0x68747541, 0x444d4163, 0x69746e65),
            "AuthenticAMD")

    def test_known_vendors(self):
        self.assertIs(vendor_from_string("GenuineIntel"), Vendor.INTEL)
        self.assertIs(vendor_from_string("AMDisbetter!"), Vendor.AMD)
        self.assertIs(vendor_from_string("HygonGenuine"), Vendor.HYGON)
        self.assertIs(vendor_from_string("  Shanghai  "), Vendor.ZHAOXIN)
        self.assertIs(vendor_from_string("CentaurHauls"), Vendor.VIA)

    def test_unknown_vendor(self):
        self.assertIs(vendor_from_string("MiSTer AO486"), Vendor.UNKNOWN)
        self.assertIsNone(vendor_name(Vendor.UNKNOWN))
        self.assertEqual(vendor_name(Vendor.INTEL), "Intel")

    def test_every_vendor_but_unknown_has_a_name(self):
        for vendor in Vendor:
            if vendor is Vendor.UNKNOWN:
                continue
            self.assertTrue(vendor_name(vendor), vendor)

    def test_hypervisor_string_stops_at_nul(self):
        # "KVMKVMKVM\0\0\0"
        self.assertEqual(
            hypervisor_string(0x4b4d564b, 0x564b4d56, 0x0000004d),
            "KVMKVMKVM")

    def test_hypervisor_name(self):
        self.assertEqual(hypervisor_name("KVMKVMKVM"), "KVM")
        self.assertEqual(hypervisor_name("Microsoft Hv"),
                         "Microsoft Hyper-V")
        self.assertEqual(hypervisor_name("NewVisor"), "NewVisor")
        self.assertIsNone(hypervisor_name(""))
