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
:mod:`cpuid_decoder.tables.uarch` -- microarchitecture annotations
==================================================================

These tables run next to the model name tables and produce an
:class:`~cpuid_decoder.rules.Arch` that is appended to the model name.
They only look at the signature: a microarchitecture does not change
with the brand a part is sold under.
"""

from cpuid_decoder.rules import (
    Arch,
    F,
    FM,
    FMS,
    NO_ARCH,
    RuleTable,
    TF,
    TFM,
)


def _k8_arch(key, stash):
    # K8 shrinks are told apart by the extended model only
    if key.extended_model == 0:
        phys = "130nm"
    elif key.extended_model in (6, 7):
        phys = "65nm"
    else:
        phys = "90nm"
    return Arch("K8", "Hammer", phys)


def _via_c3_arch(key, stash):
    if key.stepping < 8:
        return Arch("Samuel 2", "C3", "150nm", True)
    return Arch("Ezra", "C3", "130nm", True)


INTEL_UARCH_RULES = [
    F(0, 4, Arch("i486")),

    FM(0, 5, 0, 0, Arch("P5", phys="800nm", core_is_uarch=True)),
    FM(0, 5, 0, 1, Arch("P5", phys="800nm", core_is_uarch=True)),
    FM(0, 5, 0, 2, Arch("P5", phys="600nm")),
    FM(0, 5, 0, 3, Arch("P5", phys="600nm")),
    FM(0, 5, 0, 4, Arch("P5", phys="350nm")),
    FM(0, 5, 0, 7, Arch("P5", phys="350nm")),
    FM(0, 5, 0, 8, Arch("P5", phys="250nm")),
    FM(0, 5, 0, 9, Arch("Lakemont", "P5", "32nm", True)),
    FM(0, 5, 0, 10, Arch("Lakemont", "P5", "22nm", True)),
    F(0, 5, Arch("P5")),

    FM(0, 6, 0, 0, Arch("P6 Pentium Pro", "P6", "600nm")),
    FM(0, 6, 0, 1, Arch("P6 Pentium Pro", "P6", "350nm")),
    FM(0, 6, 0, 3, Arch("P6 Pentium II", "P6", "350nm")),
    FM(0, 6, 0, 4, Arch("P6 Pentium II", "P6", "250nm")),
    FM(0, 6, 0, 5, Arch("P6 Pentium II", "P6", "250nm")),
    FM(0, 6, 0, 6, Arch("P6 Pentium II", "P6", "250nm")),
    FM(0, 6, 0, 7, Arch("P6 Pentium III", "P6", "250nm")),
    FM(0, 6, 0, 8, Arch("P6 Pentium III", "P6", "180nm")),
    FM(0, 6, 0, 9, Arch("Banias", "P6 Pentium M", "130nm", True)),
    FM(0, 6, 0, 10, Arch("P6 Pentium III", "P6", "180nm")),
    FM(0, 6, 0, 11, Arch("P6 Pentium III", "P6", "130nm")),
    FM(0, 6, 0, 13, Arch("Dothan", "P6 Pentium M", "90nm", True)),
    FM(0, 6, 0, 14, Arch("Yonah", "P6 Pentium M", "65nm", True)),
    FM(0, 6, 0, 15, Arch("Merom", "Core", "65nm")),
    FM(0, 6, 1, 5, Arch("Dothan", "P6 Pentium M", "90nm")),
    FM(0, 6, 1, 6, Arch("Merom", "Core", "65nm", True)),
    FM(0, 6, 1, 7, Arch("Penryn", "Core", "45nm")),
    FM(0, 6, 1, 10, Arch("Nehalem", "Nehalem", "45nm")),
    FM(0, 6, 1, 12, Arch("Bonnell", "Atom", "45nm")),
    FM(0, 6, 1, 13, Arch("Penryn", "Core", "45nm")),
    FM(0, 6, 1, 14, Arch("Nehalem", "Nehalem", "45nm")),
    FM(0, 6, 1, 15, Arch("Nehalem", "Nehalem", "45nm")),
    FM(0, 6, 2, 5, Arch("Westmere", "Nehalem", "32nm")),
    FM(0, 6, 2, 6, Arch("Bonnell", "Atom", "45nm")),
    FM(0, 6, 2, 7, Arch("Saltwell", "Atom", "32nm")),
    FM(0, 6, 2, 10, Arch("Sandy Bridge", "Sandy Bridge", "32nm", True)),
    FM(0, 6, 2, 12, Arch("Westmere", "Nehalem", "32nm")),
    FM(0, 6, 2, 13, Arch("Sandy Bridge", "Sandy Bridge", "32nm", True)),
    FM(0, 6, 2, 14, Arch("Nehalem", "Nehalem", "45nm")),
    FM(0, 6, 2, 15, Arch("Westmere", "Nehalem", "32nm", True)),
    FM(0, 6, 3, 5, Arch("Saltwell", "Atom", "32nm")),
    FM(0, 6, 3, 6, Arch("Saltwell", "Atom", "32nm")),
    FM(0, 6, 3, 7, Arch("Silvermont", "Atom", "22nm")),
    FM(0, 6, 3, 10, Arch("Ivy Bridge", "Sandy Bridge", "22nm", True)),
    FM(0, 6, 3, 12, Arch("Haswell", "Haswell", "22nm", True)),
    FM(0, 6, 3, 13, Arch("Broadwell", "Haswell", "14nm", True)),
    FM(0, 6, 3, 14, Arch("Ivy Bridge", "Sandy Bridge", "22nm", True)),
    FM(0, 6, 3, 15, Arch("Haswell", "Haswell", "22nm", True)),
    FM(0, 6, 4, 5, Arch("Haswell", "Haswell", "22nm", True)),
    FM(0, 6, 4, 6, Arch("Haswell", "Haswell", "22nm")),
    FM(0, 6, 4, 7, Arch("Broadwell", "Haswell", "14nm", True)),
    FM(0, 6, 4, 10, Arch("Silvermont", "Atom", "22nm")),
    FM(0, 6, 4, 12, Arch("Airmont", "Atom", "14nm")),
    FM(0, 6, 4, 13, Arch("Silvermont", "Atom", "22nm")),
    FM(0, 6, 4, 14, Arch("Skylake", "Skylake", "14nm", True)),
    FM(0, 6, 4, 15, Arch("Broadwell", "Haswell", "14nm", True)),
    FMS(0, 6, 5, 5, 5, Arch("Cascade Lake", "Skylake", "14nm", True)),
    FMS(0, 6, 5, 5, 6, Arch("Cascade Lake", "Skylake", "14nm", True)),
    FMS(0, 6, 5, 5, 7, Arch("Cascade Lake", "Skylake", "14nm", True)),
    FMS(0, 6, 5, 5, 11, Arch("Cooper Lake", "Skylake", "14nm")),
    FM(0, 6, 5, 5, Arch("Skylake", "Skylake", "14nm", True)),
    FM(0, 6, 5, 6, Arch("Broadwell", "Haswell", "14nm", True)),
    FM(0, 6, 5, 7, Arch("Knights Landing", "Xeon Phi", "14nm", True)),
    FM(0, 6, 5, 10, Arch("Silvermont", "Atom", "22nm")),
    FM(0, 6, 5, 12, Arch("Goldmont", "Atom", "14nm")),
    FM(0, 6, 5, 13, Arch("Silvermont", "Atom", "28nm")),
    FM(0, 6, 5, 14, Arch("Skylake", "Skylake", "14nm", True)),
    FM(0, 6, 5, 15, Arch("Goldmont", "Atom", "14nm")),
    FM(0, 6, 6, 6, Arch("Palm Cove", "Skylake", "10nm")),
    FM(0, 6, 6, 10, Arch("Sunny Cove", "Ice Lake", "10nm")),
    FM(0, 6, 6, 12, Arch("Sunny Cove", "Ice Lake", "10nm")),
    FM(0, 6, 6, 14, Arch("Airmont", "Atom", "14nm")),
    FM(0, 6, 7, 5, Arch("Airmont", "Atom", "14nm", True)),
    FM(0, 6, 7, 10, Arch("Goldmont Plus", "Atom", "14nm")),
    FM(0, 6, 7, 13, Arch("Sunny Cove", "Ice Lake", "10nm")),
    FM(0, 6, 7, 14, Arch("Sunny Cove", "Ice Lake", "10nm")),
    FM(0, 6, 8, 5, Arch("Knights Mill", "Xeon Phi", "14nm", True)),
    FM(0, 6, 8, 6, Arch("Tremont", "Atom", "10nm")),
    FM(0, 6, 8, 10, Arch("Sunny Cove", "Lakefield", "10nm")),
    FM(0, 6, 8, 12, Arch("Willow Cove", "Tiger Lake", "10nm SuperFin")),
    FM(0, 6, 8, 13, Arch("Willow Cove", "Tiger Lake", "10nm SuperFin")),
    FM(0, 6, 8, 14, Arch("Kaby Lake", "Skylake", "14nm+", True)),
    FM(0, 6, 8, 15, Arch("Golden Cove", "Sapphire Rapids", "Intel 7")),
    FM(0, 6, 9, 6, Arch("Tremont", "Atom", "10nm")),
    FM(0, 6, 9, 7, Arch("Golden Cove", "Alder Lake", "Intel 7")),
    FM(0, 6, 9, 10, Arch("Golden Cove", "Alder Lake", "Intel 7")),
    FM(0, 6, 9, 12, Arch("Tremont", "Atom", "10nm")),
    FM(0, 6, 9, 13, Arch("Sunny Cove", "Ice Lake", "10nm")),
    FMS(0, 6, 9, 14, 9, Arch("Kaby Lake", "Skylake", "14nm+", True)),
    FM(0, 6, 9, 14, Arch("Coffee Lake", "Skylake", "14nm++", True)),
    FM(0, 6, 10, 5, Arch("Comet Lake", "Skylake", "14nm++", True)),
    FM(0, 6, 10, 6, Arch("Comet Lake", "Skylake", "14nm++", True)),
    FM(0, 6, 10, 7, Arch("Cypress Cove", "Sunny Cove", "14nm")),
    FM(0, 6, 10, 10, Arch("Redwood Cove", "Meteor Lake", "Intel 4")),
    FM(0, 6, 10, 12, Arch("Redwood Cove", "Meteor Lake", "Intel 4")),
    FM(0, 6, 10, 13, Arch("Redwood Cove", "Granite Rapids", "Intel 3")),
    FM(0, 6, 10, 14, Arch("Redwood Cove", "Granite Rapids", "Intel 3")),
    FM(0, 6, 10, 15, Arch("Crestmont", "Sierra Forest", "Intel 3")),
    FM(0, 6, 11, 5, Arch("Redwood Cove", "Arrow Lake", "Intel 3")),
    FM(0, 6, 11, 6, Arch("Crestmont", "Atom", "Intel 4")),
    FM(0, 6, 11, 7, Arch("Raptor Cove", "Raptor Lake", "Intel 7")),
    FM(0, 6, 11, 10, Arch("Raptor Cove", "Raptor Lake", "Intel 7")),
    FM(0, 6, 11, 13, Arch("Lion Cove", "Lunar Lake", "TSMC N3B")),
    FM(0, 6, 11, 14, Arch("Gracemont", "Alder Lake", "Intel 7")),
    FM(0, 6, 11, 15, Arch("Raptor Cove", "Raptor Lake", "Intel 7")),
    FM(0, 6, 12, 5, Arch("Lion Cove", "Arrow Lake", "TSMC N3B")),
    FM(0, 6, 12, 6, Arch("Lion Cove", "Arrow Lake", "TSMC N3B")),
    FM(0, 6, 12, 12, Arch("Cougar Cove", "Panther Lake", "Intel 18A")),
    FM(0, 6, 12, 15, Arch("Raptor Cove", "Emerald Rapids", "Intel 7")),
    FM(0, 6, 13, 13, Arch("Darkmont", "Clearwater Forest", "Intel 18A")),

    FM(0, 7, 0, 0, Arch("Merced", "Itanium", "180nm", True)),
    F(0, 7, Arch(family="Itanium")),

    FM(0, 11, 0, 0, Arch("Knights Ferry", "Xeon Phi", "45nm", True)),
    FM(0, 11, 0, 1, Arch("Knights Corner", "Xeon Phi", "22nm", True)),

    FM(0, 15, 0, 0, Arch("Willamette", "Netburst", "180nm", True)),
    FM(0, 15, 0, 1, Arch("Willamette", "Netburst", "180nm", True)),
    FM(0, 15, 0, 2, Arch("Northwood", "Netburst", "130nm", True)),
    FM(0, 15, 0, 3, Arch("Prescott", "Netburst", "90nm", True)),
    FM(0, 15, 0, 4, Arch("Prescott", "Netburst", "90nm", True)),
    FM(0, 15, 0, 6, Arch("Cedar Mill", "Netburst", "65nm", True)),
    F(0, 15, Arch(family="Netburst")),

    FM(1, 15, 0, 0, Arch("McKinley", "Itanium 2", "180nm", True)),
    FM(1, 15, 0, 1, Arch("Madison", "Itanium 2", "130nm", True)),
    FM(1, 15, 0, 2, Arch("Madison 9M", "Itanium 2", "130nm", True)),
    FM(3, 15, 0, 1, Arch("Coyote Cove", "Nova Lake")),
    FM(3, 15, 0, 3, Arch("Coyote Cove", "Nova Lake")),
    FM(4, 15, 0, 1, Arch("Panther Cove", "Diamond Rapids", "Intel 18A")),
    FM(0x11, 15, 0, 0, Arch("Montecito", "Itanium 2", "90nm", True)),
    FM(0x11, 15, 0, 1, Arch("Montvale", "Itanium 2", "90nm", True)),
    FM(0x11, 15, 0, 2, Arch("Tukwila", "Itanium 2", "65nm", True)),
    FM(0x12, 15, 0, 0, Arch("Poulson", "Itanium 2", "32nm", True)),
    FM(0x12, 15, 0, 1, Arch("Kittson", "Itanium 2", "32nm", True)),
]

AMD_UARCH_RULES = [
    FM(0, 4, 0, 14, Arch("Am5x86")),
    FM(0, 4, 0, 15, Arch("Am5x86")),
    F(0, 4, Arch("Am486")),

    FM(0, 5, 0, 0, Arch("K5", phys="350nm")),
    FM(0, 5, 0, 1, Arch("K5", phys="350nm")),
    FM(0, 5, 0, 2, Arch("K5", phys="350nm")),
    FM(0, 5, 0, 3, Arch("K5", phys="350nm")),
    FM(0, 5, 0, 5, Arch("Geode GX", phys="180nm")),
    FM(0, 5, 0, 6, Arch("K6", phys="300nm")),
    FM(0, 5, 0, 7, Arch("K6", phys="250nm")),
    FM(0, 5, 0, 8, Arch("K6", phys="250nm")),
    FM(0, 5, 0, 9, Arch("K6", phys="250nm")),
    FM(0, 5, 0, 10, Arch("Geode LX", phys="130nm")),
    FM(0, 5, 0, 13, Arch("K6", phys="180nm")),

    FM(0, 6, 0, 1, Arch("K7", phys="250nm")),
    FM(0, 6, 0, 2, Arch("K7", phys="180nm")),
    FM(0, 6, 0, 3, Arch("K7", phys="180nm")),
    FM(0, 6, 0, 4, Arch("K7", phys="180nm")),
    FM(0, 6, 0, 6, Arch("K7", phys="180nm")),
    FM(0, 6, 0, 7, Arch("K7", phys="180nm")),
    FM(0, 6, 0, 8, Arch("K7", phys="130nm")),
    FM(0, 6, 0, 10, Arch("K7", phys="130nm")),
    F(0, 6, Arch("K7")),

    F(0, 15, _k8_arch),

    FM(1, 15, 0, 0, Arch("K10", phys="65nm")),
    FM(1, 15, 0, 2, Arch("K10", phys="65nm")),
    F(1, 15, Arch("K10", phys="45nm")),
    F(2, 15, Arch("K8 & K10 hybrid", phys="65nm")),
    F(3, 15, Arch("K10", phys="32nm")),
    F(5, 15, Arch("Bobcat", phys="40nm")),

    FM(6, 15, 0, 0, Arch("Bulldozer", "Bulldozer", "32nm")),
    FM(6, 15, 0, 1, Arch("Bulldozer", "Bulldozer", "32nm")),
    FM(6, 15, 0, 2, Arch("Piledriver", "Bulldozer", "32nm")),
    FM(6, 15, 1, 0, Arch("Piledriver", "Bulldozer", "32nm")),
    FM(6, 15, 1, 3, Arch("Piledriver", "Bulldozer", "32nm")),
    FM(6, 15, 3, 0, Arch("Steamroller", "Bulldozer", "28nm")),
    FM(6, 15, 3, 8, Arch("Steamroller", "Bulldozer", "28nm")),
    FM(6, 15, 6, 0, Arch("Excavator", "Bulldozer", "28nm")),
    FM(6, 15, 6, 5, Arch("Excavator", "Bulldozer", "28nm")),
    FM(6, 15, 7, 0, Arch("Excavator", "Bulldozer", "28nm")),
    F(6, 15, Arch(family="Bulldozer")),

    FM(7, 15, 0, 0, Arch("Jaguar", phys="28nm")),
    FM(7, 15, 3, 0, Arch("Puma 2014", phys="28nm")),

    FM(8, 15, 0, 1, Arch("Zen", "Zen", "14nm")),
    FM(8, 15, 0, 2, Arch("Zen", "Zen", "14nm")),
    FM(8, 15, 0, 8, Arch("Zen+", "Zen", "12nm")),
    FM(8, 15, 1, 1, Arch("Zen", "Zen", "14nm")),
    FM(8, 15, 1, 8, Arch("Zen+", "Zen", "12nm")),
    FM(8, 15, 2, 0, Arch("Zen", "Zen", "14nm")),
    FM(8, 15, 3, 1, Arch("Zen 2", "Zen", "7nm")),
    FM(8, 15, 4, 7, Arch("Zen 2", "Zen", "7nm")),
    FM(8, 15, 6, 0, Arch("Zen 2", "Zen", "7nm")),
    FM(8, 15, 6, 8, Arch("Zen 2", "Zen", "7nm")),
    FM(8, 15, 7, 1, Arch("Zen 2", "Zen", "7nm")),
    FM(8, 15, 9, 0, Arch("Zen 2", "Zen", "7nm")),
    FM(8, 15, 10, 0, Arch("Zen 2", "Zen", "6nm")),
    F(8, 15, Arch(family="Zen")),

    FM(10, 15, 0, 1, Arch("Zen 3", "Zen", "7nm")),
    FM(10, 15, 0, 8, Arch("Zen 3", "Zen", "7nm")),
    FM(10, 15, 1, 1, Arch("Zen 4", "Zen", "5nm")),
    FM(10, 15, 1, 8, Arch("Zen 4", "Zen", "5nm")),
    FM(10, 15, 2, 1, Arch("Zen 3", "Zen", "7nm")),
    FM(10, 15, 4, 4, Arch("Zen 3+", "Zen", "6nm")),
    FM(10, 15, 5, 0, Arch("Zen 3", "Zen", "7nm")),
    FM(10, 15, 6, 1, Arch("Zen 4", "Zen", "5nm")),
    FM(10, 15, 7, 4, Arch("Zen 4", "Zen", "4nm")),
    FM(10, 15, 7, 8, Arch("Zen 4", "Zen", "4nm")),
    FM(10, 15, 10, 0, Arch("Zen 4c", "Zen", "5nm")),
    F(10, 15, Arch(family="Zen")),

    FM(11, 15, 0, 2, Arch("Zen 5", "Zen", "4nm")),
    FM(11, 15, 1, 1, Arch("Zen 5c", "Zen", "3nm")),
    FM(11, 15, 2, 4, Arch("Zen 5", "Zen", "4nm")),
    FM(11, 15, 4, 4, Arch("Zen 5", "Zen", "4nm")),
    FM(11, 15, 6, 0, Arch("Zen 5", "Zen", "4nm")),
    FM(11, 15, 7, 0, Arch("Zen 5", "Zen", "4nm")),
    F(11, 15, Arch(family="Zen")),
]

HYGON_UARCH_RULES = [
    FM(9, 15, 0, 0, Arch("Moksha", "Zen", "14nm")),
    FM(9, 15, 0, 1, Arch("Moksha", "Zen", "14nm")),
    FM(9, 15, 0, 2, Arch("Moksha", "Zen", "14nm")),
    F(9, 15, Arch(family="Zen")),
]

VIA_UARCH_RULES = [
    F(0, 5, Arch("WinChip", phys="350nm")),
    FM(0, 6, 0, 6, Arch("Samuel", "C3", "180nm", True)),
    FM(0, 6, 0, 7, _via_c3_arch),
    FM(0, 6, 0, 8, Arch("Ezra-T", "C3", "130nm", True)),
    FM(0, 6, 0, 9, Arch("Nehemiah", "C3", "130nm", True)),
    FM(0, 6, 0, 10, Arch("Esther", "C7", "90nm", True)),
    FM(0, 6, 0, 13, Arch("Esther", "C7", "90nm", True)),
    FM(0, 6, 0, 15, Arch("Isaiah", "Nano", "65nm", True)),
    FM(0, 6, 1, 9, Arch("ZhangJiang", phys="28nm", core_is_uarch=True)),
    FM(0, 7, 1, 11, Arch("WuDaoKou", phys="28nm", core_is_uarch=True)),
    FM(0, 7, 3, 11, Arch("LuJiaZui", phys="16nm", core_is_uarch=True)),
]

ZHAOXIN_UARCH_RULES = [
    FM(0, 6, 0, 15, Arch("ZhangJiang", phys="28nm", core_is_uarch=True)),
    FM(0, 6, 1, 9, Arch("ZhangJiang", phys="28nm", core_is_uarch=True)),
    FM(0, 7, 1, 11, Arch("WuDaoKou", phys="28nm", core_is_uarch=True)),
    FM(0, 7, 3, 11, Arch("LuJiaZui", phys="16nm", core_is_uarch=True)),
    FM(0, 7, 5, 11, Arch("Yongfeng", phys="16nm", core_is_uarch=True)),
]

CYRIX_UARCH_RULES = [
    TFM(4, 4, Arch("MediaGX")),
    TF(4, Arch("Cx5x86")),
    TFM(5, 4, Arch("MediaGX")),
    TF(5, Arch("M1", "6x86", core_is_uarch=True)),
    TFM(6, 0, Arch("M2", "6x86MX", core_is_uarch=True)),
]

TRANSMETA_UARCH_RULES = [
    TF(5, Arch("Crusoe", core_is_uarch=True)),
    TFM(15, 2, Arch("Efficeon", phys="130nm", core_is_uarch=True)),
    TFM(15, 3, Arch("Efficeon", phys="90nm", core_is_uarch=True)),
]

NSC_UARCH_RULES = [
    TF(5, Arch("Geode GX", core_is_uarch=True)),
]

INTEL_UARCH_TABLE = RuleTable("intel-uarch", INTEL_UARCH_RULES, NO_ARCH)
AMD_UARCH_TABLE = RuleTable("amd-uarch", AMD_UARCH_RULES, NO_ARCH)
HYGON_UARCH_TABLE = RuleTable("hygon-uarch", HYGON_UARCH_RULES, NO_ARCH)
VIA_UARCH_TABLE = RuleTable("via-uarch", VIA_UARCH_RULES, NO_ARCH)
ZHAOXIN_UARCH_TABLE = RuleTable(
    "zhaoxin-uarch", ZHAOXIN_UARCH_RULES, NO_ARCH)
CYRIX_UARCH_TABLE = RuleTable("cyrix-uarch", CYRIX_UARCH_RULES, NO_ARCH)
TRANSMETA_UARCH_TABLE = RuleTable(
    "transmeta-uarch", TRANSMETA_UARCH_RULES, NO_ARCH)
NSC_UARCH_TABLE = RuleTable("nsc-uarch", NSC_UARCH_RULES, NO_ARCH)
