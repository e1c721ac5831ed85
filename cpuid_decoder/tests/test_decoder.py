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
cpuid_decoder.tests.test_decoder
================================

Tests for cpuid_decoder.decoder module and the vendor tables
"""

import unittest

from cpuid_decoder.decoder import (
    amd_model_number,
    annotate,
    decode,
    decode_dump,
)
from cpuid_decoder.rules import NO_ARCH, Arch
from cpuid_decoder.stash import build_stash
from cpuid_decoder.tables import (
    SYNTH_TABLES,
    UARCH_TABLES,
    synth_table,
    uarch_table,
)
from cpuid_decoder.tests.dumps import (
    AMD,
    HYGON,
    INTEL,
    make_leaf_dump,
)
from cpuid_decoder.vendor import VENDOR_STRINGS, Vendor

IVY_BRIDGE = 0x000306a9


def synth(vendor, eax, **kwargs):
    _, result = decode_dump(make_leaf_dump(vendor, eax, **kwargs))
    return result.synth


class AnnotateTests(unittest.TestCase):

    def test_full_annotation(self):
        self.assertEqual(
            annotate("AMD Ryzen (Matisse)", Arch("Zen 2", "Zen", "7nm")),
            "AMD Ryzen (Matisse) [Zen 2] {Zen}, 7nm")

    def test_core_named_in_text(self):
        self.assertEqual(
            annotate("Intel Core (Ivy Bridge)",
                     Arch("Ivy Bridge", "Sandy Bridge", "22nm", True)),
            "Intel Core (Ivy Bridge) {Sandy Bridge}, 22nm")

    def test_uarch_repeated_when_not_the_core(self):
        self.assertEqual(
            annotate("AMD K8 clone", Arch("K8")), "AMD K8 clone [K8]")

    def test_family_already_in_text(self):
        self.assertEqual(
            annotate("AMD Athlon 64 (ClawHammer)",
                     Arch("K8", "Hammer", "130nm")),
            "AMD Athlon 64 (ClawHammer) [K8], 130nm")

    def test_no_arch(self):
        self.assertEqual(annotate("unknown", NO_ARCH), "unknown")


class IntelDecodeTests(unittest.TestCase):

    def test_desktop_core(self):
        self.assertEqual(
            synth(INTEL, IVY_BRIDGE,
                  brand="Intel(R) Core(TM) i7-3770 CPU @ 3.40GHz"),
            "Intel Core i3-3000 / i5-3000 / i7-3000 (Ivy Bridge E1/N0/L1)"
            " {Sandy Bridge}, 22nm")

    def test_xeon_same_signature(self):
        self.assertEqual(
            synth(INTEL, IVY_BRIDGE,
                  brand="Intel(R) Xeon(R) CPU E3-1230 V2 @ 3.30GHz"),
            "Intel Xeon E3-1200 v2 (Ivy Bridge E1/N0/L1)"
            " {Sandy Bridge}, 22nm")

    def test_mobile_core(self):
        self.assertEqual(
            synth(INTEL, IVY_BRIDGE,
                  brand="Intel(R) Core(TM) i7-3520M CPU @ 2.90GHz"),
            "Intel Core i3 / i5 / i7 Mobile 3000 (Ivy Bridge E1/N0/L1)"
            " {Sandy Bridge}, 22nm")

    def test_no_brand(self):
        self.assertEqual(
            synth(INTEL, IVY_BRIDGE),
            "Intel Ivy Bridge (E1/N0/L1) {Sandy Bridge}, 22nm")

    def test_unlisted_stepping(self):
        self.assertEqual(
            synth(INTEL, 0x000306a8),
            "Intel Ivy Bridge {Sandy Bridge}, 22nm")

    def test_no_amd_model_for_intel(self):
        stash = build_stash(make_leaf_dump(INTEL, IVY_BRIDGE, ebx1=0x2a))
        self.assertIsNone(amd_model_number(stash))

    def test_result_fields(self):
        stash, result = decode_dump(make_leaf_dump(
            INTEL, IVY_BRIDGE, brand="Intel(R) Core(TM) i7-3770 CPU",
            hypervisor="KVMKVMKVM"))
        self.assertEqual(result.vendor_name, "Intel")
        self.assertEqual(
            result.model,
            "Intel Core i3-3000 / i5-3000 / i7-3000 (Ivy Bridge E1/N0/L1)")
        self.assertEqual(result.arch,
                         Arch("Ivy Bridge", "Sandy Bridge", "22nm", True))
        self.assertIsNone(result.amd_model)
        self.assertEqual(result.brand, "Intel(R) Core(TM) i7-3770 CPU")
        self.assertEqual(result.hypervisor, "KVM")
        self.assertIs(result.mp, stash.mp)


class AmdDecodeTests(unittest.TestCase):

    def test_k8_with_model_number(self):
        self.assertEqual(
            synth(AMD, 0x00000f48, ebx1=0x2a),
            "AMD Athlon 64 (ClawHammer SH7-C0) Processor 3200+ [K8], 130nm")

    def test_model_number_can_be_hidden(self):
        stash = build_stash(make_leaf_dump(AMD, 0x00000f48, ebx1=0x2a))
        result = decode(stash, show_amd_model=False)
        self.assertEqual(
            result.synth, "AMD Athlon 64 (ClawHammer SH7-C0) [K8], 130nm")
        self.assertEqual(result.amd_model, "Processor 3200+")

    def test_uarch_can_be_hidden(self):
        stash = build_stash(make_leaf_dump(AMD, 0x00000f48, ebx1=0x2a))
        result = decode(stash, show_uarch=False)
        self.assertEqual(
            result.synth, "AMD Athlon 64 (ClawHammer SH7-C0) Processor 3200+")
        self.assertEqual(result.arch, Arch("K8", "Hammer", "130nm"))

    def test_zen_2(self):
        self.assertEqual(
            synth(AMD, 0x00870f10,
                  brand="AMD Ryzen 9 3900X 12-Core Processor"),
            "AMD Ryzen (Matisse) [Zen 2] {Zen}, 7nm")

    def test_override_brand_is_reported(self):
        _, result = decode_dump(make_leaf_dump(
            AMD, 0x00000f48, ebx1=0x2a, brand="AMD Processor model unknown"))
        self.assertEqual(result.brand, "AMD Athlon(tm) 64 Processor 3200+")


class OtherVendorDecodeTests(unittest.TestCase):

    def test_hygon(self):
        self.assertEqual(
            synth(HYGON, 0x00900f01),
            "Hygon C86 Dhyana (A1) [Moksha] {Zen}, 14nm")

    def test_hygon_server_line(self):
        _, result = decode_dump(make_leaf_dump(
            HYGON, 0x00900f10, brand="Hygon C86 7185 32-core Processor"))
        self.assertEqual(result.model, "Hygon C86 7100 (Dhyana)")
        _, result = decode_dump(make_leaf_dump(
            HYGON, 0x00900f10, brand="Hygon C86 3185  8-core Processor"))
        self.assertEqual(result.model, "Hygon Dhyana")

    def test_via_brand(self):
        _, result = decode_dump(make_leaf_dump(
            "CentaurHauls", 0x000006a0,
            brand="VIA C7-M Processor 1200MHz"))
        self.assertEqual(result.model, "VIA C7-M (Esther WinChip C5J)")

    def test_via_stepping_split(self):
        self.assertEqual(
            synth("CentaurHauls", 0x00000673),
            "VIA C3 (Samuel 2 WinChip C5B) / Eden ESP, 150nm")
        self.assertEqual(
            synth("CentaurHauls", 0x00000679),
            "VIA C3 (Ezra WinChip C5C), 130nm")

    def test_zhaoxin(self):
        self.assertEqual(
            synth("  Shanghai  ", 0x000107b0),
            "Zhaoxin KaiXian KX-5000 / KaiSheng KH-20000 (WuDaoKou), 28nm")

    def test_cyrix_legacy_fields(self):
        self.assertEqual(synth("CyrixInstead", 0x00000520), "Cyrix M1 6x86")

    def test_vendor_without_uarch_table(self):
        _, result = decode_dump(make_leaf_dump("RiseRiseRise", 0x00000520))
        self.assertEqual(result.synth, "Rise mP6 iDragon .18u")
        self.assertIs(result.arch, NO_ARCH)

    def test_unknown_vendor(self):
        _, result = decode_dump(make_leaf_dump("MiSTer AO486", IVY_BRIDGE))
        self.assertIsNone(result.vendor_name)
        self.assertIsNone(result.synth)
        self.assertIsNone(result.model)
        self.assertIs(result.arch, NO_ARCH)

    def test_unknown_model(self):
        self.assertEqual(synth("RiseRiseRise", 0x00000f00), "unknown")


class TableTests(unittest.TestCase):

    SIGNATURES = [
        0x00000000, 0x00000400, 0x00000543, 0x00000686, 0x000006fd,
        0x00000f29, 0x00000f48, 0x00020f32, 0x00060fb1, 0x00100f42,
        0x00600f12, 0x00730f01, 0x00870f10, 0x00900f01, 0x00a20f12,
        0x00b40f40, 0x000306a9, 0x000906ea, 0x000b06a2, 0x0fff0fff,
        0xffffffff,
    ]

    def test_every_vendor_but_unknown_has_a_table(self):
        for vendor in Vendor:
            if vendor is Vendor.UNKNOWN:
                self.assertIsNone(synth_table(vendor))
            else:
                self.assertIs(synth_table(vendor), SYNTH_TABLES[vendor])

    def test_uarch_tables(self):
        self.assertIs(uarch_table(Vendor.INTEL), UARCH_TABLES[Vendor.INTEL])
        self.assertIsNone(uarch_table(Vendor.RISE))
        self.assertIsNone(uarch_table(Vendor.UNKNOWN))

    def test_totality(self):
        for string, vendor in VENDOR_STRINGS.items():
            for eax in self.SIGNATURES:
                stash = build_stash(make_leaf_dump(string, eax))
                result = decode(stash)
                self.assertIsInstance(result.model, str, (string, eax))
                self.assertTrue(result.synth, (string, eax))
                self.assertIsInstance(result.arch, Arch)

    def test_determinism(self):
        dump = make_leaf_dump(
            AMD, 0x00000f48, ebx1=0x2a, brand="AMD Processor model unknown")
        first = decode_dump(dump)[1]
        for _ in range(3):
            self.assertEqual(decode_dump(dump)[1], first)
