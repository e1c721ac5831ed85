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
cpuid_decoder.tests.test_amd_model
==================================

Tests for cpuid_decoder.amd_model module
"""

import unittest

from cpuid_decoder.amd_model import (
    AmdModel,
    K10,
    NPT,
    decode_amd_model,
    k8_offsets,
)
from cpuid_decoder.signature import SignatureKey
from cpuid_decoder.stash import Stash
from cpuid_decoder.vendor import Vendor


def amd_stash(eax, ebx1=0, ebx_ext=0, ecx_80000008=0):
    stash = Stash()
    stash.vendor = Vendor.AMD
    stash.key = SignatureKey.from_eax(eax)
    stash.val_1_eax = eax
    stash.val_1_ebx = ebx1
    stash.val_80000001_eax = eax
    stash.val_80000001_ebx = ebx_ext
    stash.val_80000008_ecx = ecx_80000008
    return stash


class K8Tests(unittest.TestCase):

    def test_offsets(self):
        offsets = k8_offsets(10)
        self.assertEqual(offsets["XX"], 32)
        self.assertEqual(offsets["YY"], 58)
        self.assertEqual(offsets["RR"], 95)

    def test_athlon_64_from_leaf_1(self):
        # BrandId 0x2a: BTI 0x04 in bits [7:5] << 2, NN 10 in bits [4:0]
        model = decode_amd_model(amd_stash(0x00000f48, ebx1=0x2a))
        self.assertEqual(
            model, AmdModel("AMD Athlon(tm) 64", None, "Processor 3200+"))

    def test_brand_id_from_extended_leaf(self):
        # Opteron 2xx: BTI 0x10 in bits [11:6], NN 10 in bits [5:0]
        model = decode_amd_model(
            amd_stash(0x00000f5a, ebx_ext=(0x10 << 6) | 10))
        self.assertEqual(
            model, AmdModel("AMD Opteron(tm)", None, "Processor 258"))

    def test_fx_has_brand_post(self):
        model = decode_amd_model(
            amd_stash(0x00000f48, ebx_ext=(0x06 << 6) | 33))
        self.assertEqual(
            model, AmdModel("AMD Athlon(tm) 64", "Dual Core", "FX-57"))

    def test_no_brand_id(self):
        self.assertIsNone(decode_amd_model(amd_stash(0x00000f48)))

    def test_unknown_bti(self):
        self.assertIsNone(
            decode_amd_model(amd_stash(0x00000f48, ebx_ext=0x3f << 6)))


class NptTests(unittest.TestCase):

    def test_key_packing(self):
        self.assertEqual(NPT(3, 1, 4, 6), (3 << 11) + (1 << 9) + (4 << 4) + 6)

    def test_athlon_64_x2(self):
        # PkgType 3 (AM2) from model bits, CmpCap 1, BTI 4, PwrLmt 6,
        # NN 25
        ebx = 25 | (3 << 6) | (4 << 9)
        model = decode_amd_model(
            amd_stash(0x00060fb1, ebx_ext=ebx, ecx_80000008=1))
        self.assertEqual(model, AmdModel(
            "AMD Athlon(tm) 64 X2 Dual Core", None, "Processor 5000+"))

    def test_unlisted_combination(self):
        self.assertIsNone(decode_amd_model(
            amd_stash(0x00060fb1, ebx_ext=31 << 9, ecx_80000008=1)))


class K10Tests(unittest.TestCase):

    def test_key_packing(self):
        self.assertEqual(K10(1, 3, 0, 3), (1 << 13) + (3 << 5) + 3)

    def test_phenom_ii_x4(self):
        # PkgType 1, String1 3, PartialModel 40, NC 3
        ebx = (1 << 28) | (3 << 11) | (40 << 4)
        model = decode_amd_model(
            amd_stash(0x00100f42, ebx_ext=ebx, ecx_80000008=3))
        self.assertEqual(
            model, AmdModel("AMD Phenom(tm) II X4", None, "940"))

    def test_string2_suffix(self):
        # Opteron 6176 SE: G34, NC 11, String2 1
        ebx = (3 << 28) | (76 << 4) | 1
        model = decode_amd_model(
            amd_stash(0x00100f91, ebx_ext=ebx, ecx_80000008=11))
        self.assertEqual(
            model, AmdModel("AMD Opteron(tm) Processor", "SE", "6176"))

    def test_embedded_has_no_number(self):
        ebx = (0 << 28) | (1 << 15) | (2 << 11) | (12 << 4)
        model = decode_amd_model(
            amd_stash(0x00100f42, ebx_ext=ebx, ecx_80000008=3))
        self.assertEqual(
            model, AmdModel("Embedded AMD Opteron(tm) Processor", None, ""))


class OtherFamiliesTests(unittest.TestCase):

    def test_zen_has_no_packed_name(self):
        self.assertIsNone(
            decode_amd_model(amd_stash(0x00870f10, ebx_ext=0x12345678)))
