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
:mod:`cpuid_decoder.tables.others` -- model names of the smaller vendors
========================================================================

Most of these vendors shipped parts long before extended family and
model fields existed, so their tables compare the plain 4-bit values.
VIA and Zhaoxin parts are recent enough to need the synthesized ones.
"""

from cpuid_decoder.predicates import via_c7_m, via_eden, via_nano
from cpuid_decoder.rules import (
    F,
    FM,
    FMQ,
    RuleTable,
    TF,
    TFM,
    TFMS,
)


def _stepping_split(boundary, below, above):
    # One model number covers two cores, split by stepping
    def result(key, stash):
        return below if key.stepping < boundary else above
    return result


CYRIX_RULES = [
    TFM(4, 4, "Cyrix Media GX / GXm"),
    TFM(4, 9, "Cyrix 5x86"),
    TF(4, "Cyrix 5x86 (unknown model)"),
    TFM(5, 2, "Cyrix M1 6x86"),
    TFM(5, 3, "Cyrix M1 6x86 (2x multiplier)"),
    TFM(5, 4, "Cyrix GXm"),
    TF(5, "Cyrix M1 / GXm (unknown model)"),
    TFM(6, 0, "Cyrix M2 6x86MX"),
    TFM(6, 5, "VIA Cyrix M2 core"),
    TFM(6, 6, "VIA WinChip C5A core"),
    TFMS(6, 7, 0, "VIA WinChip C5B core"),
    TFM(6, 7, "VIA WinChip C5C core (Ezra)"),
    TFM(6, 8, "VIA WinChip C5N core (Ezra-T)"),
    TFM(6, 9, "VIA WinChip C5XL core (Nehemiah)"),
    TF(6, "Cyrix M2 / VIA core (unknown model)"),
]

VIA_RULES = [
    FM(0, 5, 0, 4, "IDT WinChip C6"),
    FM(0, 5, 0, 8, "IDT WinChip 2"),
    FM(0, 5, 0, 9, "IDT WinChip 3"),
    F(0, 5, "IDT WinChip (unknown model)"),
    FM(0, 6, 0, 6, "VIA C3 (Samuel WinChip C5A)"),
    FM(0, 6, 0, 7, _stepping_split(
        8, "VIA C3 (Samuel 2 WinChip C5B) / Eden ESP",
        "VIA C3 (Ezra WinChip C5C)")),
    FM(0, 6, 0, 8, "VIA C3 (Ezra-T WinChip C5N)"),
    FM(0, 6, 0, 9, _stepping_split(
        8, "VIA C3 / Eden ESP (Nehemiah WinChip C5XL)",
        "VIA C3 / C3-M / Eden-N (Nehemiah WinChip C5P)")),
    FMQ(0, 6, 0, 10, via_c7_m, "VIA C7-M (Esther WinChip C5J)"),
    FMQ(0, 6, 0, 10, via_eden, "VIA Eden (Esther WinChip C5J)"),
    FM(0, 6, 0, 10, "VIA C7 (Esther WinChip C5J)"),
    FMQ(0, 6, 0, 13, via_c7_m, "VIA C7-M (Esther WinChip C5J Model D)"),
    FMQ(0, 6, 0, 13, via_eden, "VIA Eden (Esther WinChip C5J Model D)"),
    FM(0, 6, 0, 13, "VIA C7 (Esther WinChip C5J Model D)"),
    FMQ(0, 6, 0, 15, via_nano, "VIA Nano (Isaiah)"),
    FMQ(0, 6, 0, 15, via_eden, "VIA Eden X2 / X4 (Isaiah)"),
    FM(0, 6, 0, 15, "VIA QuadCore / Nano (Isaiah)"),
    FM(0, 6, 1, 9, "Zhaoxin KaiXian ZX-C+ (ZhangJiang)"),
    F(0, 6, "VIA C3 / C7 / Eden / Nano (unknown model)"),
    FM(0, 7, 1, 11, "Zhaoxin KaiXian KX-5000 (WuDaoKou)"),
    FM(0, 7, 3, 11, "Zhaoxin KaiXian KX-6000 (LuJiaZui)"),
    F(0, 7, "Zhaoxin (unknown model)"),
]

ZHAOXIN_RULES = [
    FM(0, 6, 0, 15, "Zhaoxin KaiXian ZX-C (ZhangJiang)"),
    FM(0, 6, 1, 9, "Zhaoxin KaiXian ZX-C+ (ZhangJiang)"),
    F(0, 6, "Zhaoxin KaiXian ZX-C (unknown model)"),
    FM(0, 7, 1, 11, "Zhaoxin KaiXian KX-5000 / KaiSheng KH-20000"
                    " (WuDaoKou)"),
    FM(0, 7, 3, 11, "Zhaoxin KaiXian KX-6000 / KaiSheng KH-30000"
                    " (LuJiaZui)"),
    FM(0, 7, 5, 11, "Zhaoxin KaiXian KX-7000 / KaiSheng KH-40000"
                    " (Yongfeng)"),
    F(0, 7, "Zhaoxin KaiXian / KaiSheng (unknown model)"),
]

TRANSMETA_RULES = [
    TFMS(5, 4, 2, "Transmeta Crusoe TM3200"),
    TFMS(5, 4, 3, "Transmeta Crusoe TM5x00 / TM3x00"),
    TFM(5, 4, "Transmeta Crusoe TM3x00 / TM5x00"),
    TF(5, "Transmeta Crusoe (unknown model)"),
    TFM(15, 2, "Transmeta Efficeon TM8000 (130nm)"),
    TFM(15, 3, "Transmeta Efficeon TM8000 (90nm)"),
    TF(15, "Transmeta Efficeon (unknown model)"),
]

UMC_RULES = [
    TFM(4, 1, "UMC U5D (486DX)"),
    TFM(4, 2, "UMC U5S (486SX)"),
    TF(4, "UMC 486 (unknown model)"),
]

NEXGEN_RULES = [
    TFMS(5, 0, 4, "NexGen P100"),
    TFMS(5, 0, 6, "NexGen P120 (E2/C0)"),
    TF(5, "NexGen Nx586 (unknown model)"),
]

RISE_RULES = [
    TFM(5, 0, "Rise mP6 iDragon .25u"),
    TFM(5, 2, "Rise mP6 iDragon .18u"),
    TFM(5, 8, "Rise mP6 iDragon II .25u"),
    TFM(5, 9, "Rise mP6 iDragon II .18u"),
    TF(5, "Rise mP6 (unknown model)"),
]

SIS_RULES = [
    TFM(5, 0, "SiS 55x"),
    TF(5, "SiS (unknown model)"),
]

NSC_RULES = [
    TFM(5, 4, "NSC Geode GX1 / GXLV / GXm"),
    TFM(5, 5, "NSC Geode GX2"),
    TF(5, "NSC Geode (unknown model)"),
]

VORTEX_RULES = [
    TFM(5, 2, "DM&P Vortex86DX / MX"),
    TFM(5, 8, "DM&P Vortex86DX2 / MX+"),
    TF(5, "DM&P Vortex86 (unknown model)"),
    TFM(6, 0, "DM&P Vortex86EX"),
    TFM(6, 1, "DM&P Vortex86DX3"),
    TF(6, "DM&P Vortex86 (unknown model)"),
]

RDC_RULES = [
    TFM(4, 0x9, "RDC IAD 100"),
    TF(4, "RDC IAD 100 (unknown model)"),
]

CYRIX_TABLE = RuleTable("cyrix", CYRIX_RULES, default="unknown")
VIA_TABLE = RuleTable("via", VIA_RULES, default="unknown")
ZHAOXIN_TABLE = RuleTable("zhaoxin", ZHAOXIN_RULES, default="unknown")
TRANSMETA_TABLE = RuleTable("transmeta", TRANSMETA_RULES, default="unknown")
UMC_TABLE = RuleTable("umc", UMC_RULES, default="unknown")
NEXGEN_TABLE = RuleTable("nexgen", NEXGEN_RULES, default="unknown")
RISE_TABLE = RuleTable("rise", RISE_RULES, default="unknown")
SIS_TABLE = RuleTable("sis", SIS_RULES, default="unknown")
NSC_TABLE = RuleTable("nsc", NSC_RULES, default="unknown")
VORTEX_TABLE = RuleTable("vortex", VORTEX_RULES, default="unknown")
RDC_TABLE = RuleTable("rdc", RDC_RULES, default="unknown")
