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
:mod:`cpuid_decoder.tables.amd` -- AMD model names
==================================================

Model names by signature, from the AMD revision guides. Silicon revisions
are given as AMD's core code and stepping letters (``SH7-C0``,
``DR-B3``). Same-signature parts are told apart by the brand string, and
for K7 parts without one, by the L2 size.
"""

from cpuid_decoder.predicates import (
    amd_athlon_fx,
    amd_athlon_mp,
    amd_duron_mp,
    amd_embedded,
    amd_epyc,
    amd_epyc_3000,
    amd_firepro,
    amd_fx,
    amd_geode,
    amd_neo,
    amd_opteron,
    amd_phenom,
    amd_ryzen,
    amd_series,
    amd_small_l2,
    amd_t_suffix,
    amd_turion,
    amd_ultra,
    desktop_athlon,
    desktop_athlon_xp,
    desktop_duron,
    desktop_ryzen,
    desktop_sempron,
    dual_core,
    dual_core_opteron,
    eight_core_opteron,
    k7_duron_l2,
    mobile_athlon,
    mobile_athlon_xp,
    mobile_duron,
    mobile_ryzen,
    mobile_sempron,
    quad_core_opteron,
    six_core,
    six_core_opteron,
    sixteen_core_opteron,
    triple_core,
    twelve_core_opteron,
)
from cpuid_decoder.rules import (
    F,
    FM,
    FMQ,
    FMS,
    FMSQ,
    RuleTable,
)


AMD_RULES = [
    # Family 4: Am486 and Am5x86
    FM(0, 4, 0, 3, "AMD 80486DX2"),
    FM(0, 4, 0, 7, "AMD 80486DX2WB"),
    FM(0, 4, 0, 8, "AMD 80486DX4"),
    FM(0, 4, 0, 9, "AMD 80486DX4WB"),
    FM(0, 4, 0, 10, "AMD Elan SC400"),
    FM(0, 4, 0, 14, "AMD 5x86"),
    FM(0, 4, 0, 15, "AMD 5x86WB"),
    F(0, 4, "AMD 80486 / 5x86 (unknown model)"),

    # Family 5: K5, K6, Geode
    FM(0, 5, 0, 0, "AMD SSA5 (PR75, PR90, PR100)"),
    FM(0, 5, 0, 1, "AMD 5k86 (PR120, PR133)"),
    FM(0, 5, 0, 2, "AMD 5k86 (PR166)"),
    FM(0, 5, 0, 3, "AMD 5k86 (PR200)"),
    FM(0, 5, 0, 5, "AMD Geode GX"),
    FM(0, 5, 0, 6, "AMD K6 (Little Foot)"),
    FM(0, 5, 0, 7, "AMD K6 (Little Foot)"),
    FM(0, 5, 0, 8, "AMD K6-2 (Chomper)"),
    FM(0, 5, 0, 9, "AMD K6-III (Sharptooth)"),
    FMQ(0, 5, 0, 10, amd_geode, "AMD Geode LX"),
    FM(0, 5, 0, 10, "AMD Geode LX / NX"),
    FM(0, 5, 0, 13, "AMD K6-2+ / K6-III+ (Sharptooth)"),
    F(0, 5, "AMD 5k86 / K6 / Geode (unknown model)"),

    # Family 6: K7
    FM(0, 6, 0, 0, "AMD Athlon (Argon)"),
    FM(0, 6, 0, 1, "AMD Athlon (Argon)"),
    FM(0, 6, 0, 2, "AMD Athlon (K75 / Pluto / Orion)"),
    FMS(0, 6, 0, 3, 0, "AMD Duron / mobile Duron (Spitfire A0)"),
    FMS(0, 6, 0, 3, 1, "AMD Duron / mobile Duron (Spitfire A2)"),
    FM(0, 6, 0, 3, "AMD Duron / mobile Duron (Spitfire)"),
    FMS(0, 6, 0, 4, 2, "AMD Athlon (Thunderbird A4-A7)"),
    FMS(0, 6, 0, 4, 4, "AMD Athlon (Thunderbird A9)"),
    FM(0, 6, 0, 4, "AMD Athlon (Thunderbird)"),
    FMSQ(0, 6, 0, 6, 0, amd_athlon_mp, "AMD Athlon MP (Palomino A0)"),
    FMSQ(0, 6, 0, 6, 0, mobile_athlon,
         "AMD mobile Athlon 4 (Palomino A0)"),
    FMSQ(0, 6, 0, 6, 0, mobile_duron, "AMD mobile Duron (Morgan A0)"),
    FMS(0, 6, 0, 6, 0, "AMD Athlon XP (Palomino A0)"),
    FMSQ(0, 6, 0, 6, 1, amd_athlon_mp, "AMD Athlon MP (Palomino A2)"),
    FMSQ(0, 6, 0, 6, 1, mobile_athlon,
         "AMD mobile Athlon 4 (Palomino A2)"),
    FMSQ(0, 6, 0, 6, 1, mobile_duron, "AMD mobile Duron (Morgan A2)"),
    FMSQ(0, 6, 0, 6, 1, desktop_duron, "AMD Duron (Palomino A2)"),
    FMS(0, 6, 0, 6, 1, "AMD Athlon XP (Palomino A2)"),
    FMSQ(0, 6, 0, 6, 2, amd_athlon_mp, "AMD Athlon MP (Palomino A5)"),
    FMSQ(0, 6, 0, 6, 2, mobile_athlon_xp,
         "AMD mobile Athlon XP (Palomino A5)"),
    FMSQ(0, 6, 0, 6, 2, mobile_athlon,
         "AMD mobile Athlon 4 (Palomino A5)"),
    FMSQ(0, 6, 0, 6, 2, mobile_duron, "AMD mobile Duron (Morgan A5)"),
    FMSQ(0, 6, 0, 6, 2, desktop_duron, "AMD Duron (Palomino A5)"),
    FMS(0, 6, 0, 6, 2, "AMD Athlon XP (Palomino A5)"),
    FMQ(0, 6, 0, 6, amd_athlon_mp, "AMD Athlon MP (Palomino)"),
    FMQ(0, 6, 0, 6, mobile_athlon, "AMD mobile Athlon 4 (Palomino)"),
    FM(0, 6, 0, 6, "AMD Athlon XP (Palomino)"),
    FMSQ(0, 6, 0, 7, 0, amd_duron_mp, "AMD Duron MP (Morgan A0)"),
    FMSQ(0, 6, 0, 7, 0, mobile_duron, "AMD mobile Duron (Camaro A0)"),
    FMS(0, 6, 0, 7, 0, "AMD Duron (Morgan A0)"),
    FMSQ(0, 6, 0, 7, 1, amd_duron_mp, "AMD Duron MP (Morgan A1)"),
    FMSQ(0, 6, 0, 7, 1, mobile_duron, "AMD mobile Duron (Camaro A1)"),
    FMS(0, 6, 0, 7, 1, "AMD Duron (Morgan A1)"),
    FM(0, 6, 0, 7, "AMD Duron (Morgan)"),
    FMSQ(0, 6, 0, 8, 0, amd_athlon_mp, "AMD Athlon MP (Thoroughbred A0)"),
    FMSQ(0, 6, 0, 8, 0, desktop_athlon_xp,
         "AMD Athlon XP (Thoroughbred A0)"),
    FMSQ(0, 6, 0, 8, 0, desktop_duron, "AMD Duron (Applebred A0)"),
    FMSQ(0, 6, 0, 8, 0, desktop_sempron,
         "AMD Sempron (Thoroughbred A0)"),
    FMSQ(0, 6, 0, 8, 0, mobile_athlon_xp,
         "AMD mobile Athlon XP-M (Thoroughbred A0)"),
    FMSQ(0, 6, 0, 8, 0, k7_duron_l2, "AMD Duron (Applebred A0)"),
    FMS(0, 6, 0, 8, 0, "AMD Athlon XP (Thoroughbred A0)"),
    FMSQ(0, 6, 0, 8, 1, amd_athlon_mp, "AMD Athlon MP (Thoroughbred B0)"),
    FMSQ(0, 6, 0, 8, 1, desktop_athlon_xp,
         "AMD Athlon XP (Thoroughbred B0)"),
    FMSQ(0, 6, 0, 8, 1, desktop_duron, "AMD Duron (Applebred B0)"),
    FMSQ(0, 6, 0, 8, 1, desktop_sempron,
         "AMD Sempron (Thoroughbred B0)"),
    FMSQ(0, 6, 0, 8, 1, mobile_athlon_xp,
         "AMD mobile Athlon XP-M (Thoroughbred B0)"),
    FMSQ(0, 6, 0, 8, 1, k7_duron_l2, "AMD Duron (Applebred B0)"),
    FMS(0, 6, 0, 8, 1, "AMD Athlon XP (Thoroughbred B0)"),
    FMQ(0, 6, 0, 8, amd_athlon_mp, "AMD Athlon MP (Thoroughbred)"),
    FMQ(0, 6, 0, 8, k7_duron_l2, "AMD Duron (Applebred)"),
    FM(0, 6, 0, 8, "AMD Athlon XP (Thoroughbred)"),
    FMSQ(0, 6, 0, 10, 0, amd_athlon_mp, "AMD Athlon MP (Barton A2)"),
    FMSQ(0, 6, 0, 10, 0, mobile_athlon_xp,
         "AMD mobile Athlon XP-M (Barton A2)"),
    FMSQ(0, 6, 0, 10, 0, mobile_sempron,
         "AMD mobile Sempron (Barton A2)"),
    FMSQ(0, 6, 0, 10, 0, desktop_sempron, "AMD Sempron (Barton A2)"),
    FMSQ(0, 6, 0, 10, 0, amd_small_l2, "AMD Athlon XP (Thorton A2)"),
    FMS(0, 6, 0, 10, 0, "AMD Athlon XP (Barton A2)"),
    FMQ(0, 6, 0, 10, amd_athlon_mp, "AMD Athlon MP (Barton)"),
    FMQ(0, 6, 0, 10, amd_small_l2, "AMD Athlon XP (Thorton)"),
    FM(0, 6, 0, 10, "AMD Athlon XP (Barton)"),
    F(0, 6, "AMD Athlon / Athlon XP / Athlon MP / Duron / Sempron"
            " (unknown model)"),

    # Family 0xf: K8
    FMSQ(0, 15, 0, 4, 0, amd_athlon_fx,
         "AMD Athlon 64 FX (SledgeHammer SH7-B3)"),
    FMSQ(0, 15, 0, 4, 0, mobile_athlon,
         "AMD mobile Athlon 64 (ClawHammer SH7-B3)"),
    FMS(0, 15, 0, 4, 0, "AMD Athlon 64 (ClawHammer SH7-B3)"),
    FMSQ(0, 15, 0, 4, 8, amd_athlon_fx,
         "AMD Athlon 64 FX (SledgeHammer SH7-C0)"),
    FMSQ(0, 15, 0, 4, 8, mobile_athlon,
         "AMD mobile Athlon 64 (ClawHammer SH7-C0)"),
    FMS(0, 15, 0, 4, 8, "AMD Athlon 64 (ClawHammer SH7-C0)"),
    FMSQ(0, 15, 0, 4, 10, amd_athlon_fx,
         "AMD Athlon 64 FX (SledgeHammer SH7-CG)"),
    FMSQ(0, 15, 0, 4, 10, mobile_athlon,
         "AMD mobile Athlon 64 (ClawHammer SH7-CG)"),
    FMSQ(0, 15, 0, 4, 10, mobile_sempron,
         "AMD mobile Sempron (Dublin SH7-CG)"),
    FMS(0, 15, 0, 4, 10, "AMD Athlon 64 (ClawHammer SH7-CG)"),
    FMQ(0, 15, 0, 4, amd_athlon_fx, "AMD Athlon 64 FX (SledgeHammer)"),
    FM(0, 15, 0, 4, "AMD Athlon 64 (ClawHammer)"),
    FMSQ(0, 15, 0, 5, 0, amd_opteron, "AMD Opteron (SledgeHammer SH7-B3)"),
    FMSQ(0, 15, 0, 5, 1, amd_opteron, "AMD Opteron (SledgeHammer SH7-C0)"),
    FMSQ(0, 15, 0, 5, 8, amd_opteron, "AMD Opteron (SledgeHammer SH7-C0)"),
    FMSQ(0, 15, 0, 5, 8, amd_athlon_fx,
         "AMD Athlon 64 FX (SledgeHammer SH7-C0)"),
    FMSQ(0, 15, 0, 5, 10, amd_opteron, "AMD Opteron (SledgeHammer SH7-CG)"),
    FMSQ(0, 15, 0, 5, 10, amd_athlon_fx,
         "AMD Athlon 64 FX (SledgeHammer SH7-CG)"),
    FMQ(0, 15, 0, 5, amd_athlon_fx, "AMD Athlon 64 FX (SledgeHammer)"),
    FM(0, 15, 0, 5, "AMD Opteron (SledgeHammer)"),
    FMSQ(0, 15, 0, 7, 10, amd_athlon_fx,
         "AMD Athlon 64 FX (SledgeHammer SH7-CG)"),
    FMS(0, 15, 0, 7, 10, "AMD Athlon 64 (ClawHammer SH7-CG)"),
    FM(0, 15, 0, 7, "AMD Athlon 64 (ClawHammer)"),
    FMSQ(0, 15, 0, 8, 2, mobile_sempron,
         "AMD mobile Sempron (Dublin CH7-CG)"),
    FMSQ(0, 15, 0, 8, 2, mobile_athlon,
         "AMD mobile Athlon 64 (Odessa CH7-CG)"),
    FMS(0, 15, 0, 8, 2, "AMD Athlon 64 (Odessa CH7-CG)"),
    FM(0, 15, 0, 8, "AMD Athlon 64 (Odessa)"),
    FMSQ(0, 15, 0, 11, 2, desktop_sempron, "AMD Sempron (Paris CH7-CG)"),
    FMS(0, 15, 0, 11, 2, "AMD Athlon 64 (Newcastle CH7-CG)"),
    FM(0, 15, 0, 11, "AMD Athlon 64 (Newcastle)"),
    FMSQ(0, 15, 0, 12, 0, desktop_sempron, "AMD Sempron (Paris DH7-CG)"),
    FMSQ(0, 15, 0, 12, 0, mobile_sempron,
         "AMD mobile Sempron (Dublin DH7-CG)"),
    FMSQ(0, 15, 0, 12, 0, mobile_athlon,
         "AMD mobile Athlon 64 (Oakville DH7-CG)"),
    FMS(0, 15, 0, 12, 0, "AMD Athlon 64 (Newcastle DH7-CG)"),
    FM(0, 15, 0, 12, "AMD Athlon 64 (Newcastle)"),
    FMSQ(0, 15, 0, 14, 0, desktop_sempron, "AMD Sempron (Paris DH7-CG)"),
    FMS(0, 15, 0, 14, 0, "AMD Athlon 64 (Newcastle DH7-CG)"),
    FM(0, 15, 0, 14, "AMD Athlon 64 (Newcastle)"),
    FMSQ(0, 15, 0, 15, 0, desktop_sempron, "AMD Sempron (Paris DH7-CG)"),
    FMSQ(0, 15, 0, 15, 0, mobile_athlon,
         "AMD mobile Athlon 64 (Oakville DH7-CG)"),
    FMS(0, 15, 0, 15, 0, "AMD Athlon 64 (Newcastle DH7-CG)"),
    FM(0, 15, 0, 15, "AMD Athlon 64 (Newcastle)"),
    FMSQ(0, 15, 1, 4, 0, amd_athlon_fx,
         "AMD Athlon 64 FX (SledgeHammer SH8-D0)"),
    FMSQ(0, 15, 1, 4, 0, mobile_athlon,
         "AMD mobile Athlon 64 (ClawHammer SH8-D0)"),
    FMS(0, 15, 1, 4, 0, "AMD Athlon 64 (Winchester SH8-D0)"),
    FM(0, 15, 1, 4, "AMD Athlon 64 (Winchester)"),
    FMSQ(0, 15, 1, 5, 0, amd_athlon_fx,
         "AMD Athlon 64 FX (SledgeHammer SH8-D0)"),
    FMS(0, 15, 1, 5, 0, "AMD Opteron (Winchester SH8-D0)"),
    FM(0, 15, 1, 5, "AMD Opteron (Winchester)"),
    FMSQ(0, 15, 1, 8, 0, mobile_athlon,
         "AMD mobile Athlon 64 (Oakville CH8-D0)"),
    FMS(0, 15, 1, 8, 0, "AMD Athlon 64 (Winchester CH8-D0)"),
    FMS(0, 15, 1, 11, 0, "AMD Athlon 64 (Winchester CH8-D0)"),
    FMSQ(0, 15, 1, 12, 0, desktop_sempron, "AMD Sempron (Palermo DH8-D0)"),
    FMSQ(0, 15, 1, 12, 0, mobile_sempron,
         "AMD mobile Sempron (Sonora DH8-D0)"),
    FMSQ(0, 15, 1, 12, 0, mobile_athlon,
         "AMD mobile Athlon 64 (Oakville DH8-D0)"),
    FMS(0, 15, 1, 12, 0, "AMD Athlon 64 (Winchester DH8-D0)"),
    FMQ(0, 15, 1, 12, desktop_sempron, "AMD Sempron (Palermo)"),
    FM(0, 15, 1, 12, "AMD Athlon 64 (Winchester)"),
    FMSQ(0, 15, 1, 15, 0, desktop_sempron, "AMD Sempron (Palermo DH8-D0)"),
    FMS(0, 15, 1, 15, 0, "AMD Athlon 64 (Winchester DH8-D0)"),
    FMQ(0, 15, 1, 15, desktop_sempron, "AMD Sempron (Palermo)"),
    FM(0, 15, 1, 15, "AMD Athlon 64 (Winchester)"),
    FMSQ(0, 15, 2, 1, 0, dual_core_opteron,
         "AMD Dual Core Opteron (Egypt/Italy/Denmark JH-E1)"),
    FMS(0, 15, 2, 1, 0, "AMD Opteron (JH-E1)"),
    FMSQ(0, 15, 2, 1, 2, dual_core_opteron,
         "AMD Dual Core Opteron (Egypt/Italy/Denmark JH-E6)"),
    FMS(0, 15, 2, 1, 2, "AMD Opteron (JH-E6)"),
    FM(0, 15, 2, 1, "AMD Dual Core Opteron (Egypt/Italy/Denmark)"),
    FMSQ(0, 15, 2, 3, 2, amd_opteron,
         "AMD Dual Core Opteron (Denmark JH-E6)"),
    FMSQ(0, 15, 2, 3, 2, amd_athlon_fx, "AMD Athlon 64 FX (Toledo JH-E6)"),
    FMS(0, 15, 2, 3, 2, "AMD Athlon 64 X2 (Toledo JH-E6)"),
    FM(0, 15, 2, 3, "AMD Athlon 64 X2 (Toledo)"),
    FMSQ(0, 15, 2, 4, 2, amd_turion, "AMD Turion 64 (Lancaster SH-E5)"),
    FMSQ(0, 15, 2, 4, 2, mobile_athlon,
         "AMD mobile Athlon 64 (Newark SH-E5)"),
    FMS(0, 15, 2, 4, 2, "AMD Athlon 64 (Newark SH-E5)"),
    FM(0, 15, 2, 4, "AMD Athlon 64 / Turion 64 (Newark/Lancaster)"),
    FMSQ(0, 15, 2, 5, 1, amd_opteron, "AMD Opteron (Troy/Athens SH-E4)"),
    FMS(0, 15, 2, 5, 1, "AMD Athlon 64 FX (San Diego SH-E4)"),
    FM(0, 15, 2, 5, "AMD Opteron (Troy/Athens)"),
    FMSQ(0, 15, 2, 7, 1, amd_opteron, "AMD Opteron (Venus SH-E4)"),
    FMSQ(0, 15, 2, 7, 1, amd_athlon_fx,
         "AMD Athlon 64 FX (San Diego SH-E4)"),
    FMS(0, 15, 2, 7, 1, "AMD Athlon 64 (San Diego SH-E4)"),
    FM(0, 15, 2, 7, "AMD Athlon 64 (San Diego)"),
    FMSQ(0, 15, 2, 11, 1, amd_turion, "AMD Turion 64 X2 (Taylor BH-E4)"),
    FMS(0, 15, 2, 11, 1, "AMD Athlon 64 X2 (Manchester BH-E4)"),
    FM(0, 15, 2, 11, "AMD Athlon 64 X2 (Manchester)"),
    FMSQ(0, 15, 2, 12, 0, desktop_sempron, "AMD Sempron (Palermo DH-E3)"),
    FMSQ(0, 15, 2, 12, 0, mobile_sempron,
         "AMD mobile Sempron (Albany DH-E3)"),
    FMS(0, 15, 2, 12, 0, "AMD Athlon 64 (Venice DH-E3)"),
    FMSQ(0, 15, 2, 12, 2, desktop_sempron, "AMD Sempron (Palermo DH-E6)"),
    FMSQ(0, 15, 2, 12, 2, mobile_sempron,
         "AMD mobile Sempron (Albany DH-E6)"),
    FMS(0, 15, 2, 12, 2, "AMD Athlon 64 (Venice DH-E6)"),
    FMQ(0, 15, 2, 12, desktop_sempron, "AMD Sempron (Palermo)"),
    FM(0, 15, 2, 12, "AMD Athlon 64 (Venice)"),
    FMSQ(0, 15, 2, 15, 0, desktop_sempron, "AMD Sempron (Palermo DH-E3)"),
    FMS(0, 15, 2, 15, 0, "AMD Athlon 64 (Venice DH-E3)"),
    FMSQ(0, 15, 2, 15, 2, desktop_sempron, "AMD Sempron (Palermo DH-E6)"),
    FMS(0, 15, 2, 15, 2, "AMD Athlon 64 (Venice DH-E6)"),
    FMQ(0, 15, 2, 15, desktop_sempron, "AMD Sempron (Palermo)"),
    FM(0, 15, 2, 15, "AMD Athlon 64 (Venice)"),
    FMSQ(0, 15, 4, 1, 2, dual_core_opteron,
         "AMD Dual-Core Opteron (Santa Rosa JH-F2)"),
    FMSQ(0, 15, 4, 1, 2, amd_opteron, "AMD Opteron (Santa Rosa JH-F2)"),
    FMS(0, 15, 4, 1, 2, "AMD Athlon 64 FX (Windsor JH-F2)"),
    FMSQ(0, 15, 4, 1, 3, dual_core_opteron,
         "AMD Dual-Core Opteron (Santa Rosa JH-F3)"),
    FMS(0, 15, 4, 1, 3, "AMD Opteron (Santa Rosa JH-F3)"),
    FM(0, 15, 4, 1, "AMD Opteron (Santa Rosa)"),
    FMSQ(0, 15, 4, 3, 2, amd_athlon_fx, "AMD Athlon 64 FX (Windsor JH-F2)"),
    FMSQ(0, 15, 4, 3, 2, amd_opteron,
         "AMD Dual-Core Opteron (Santa Ana JH-F2)"),
    FMS(0, 15, 4, 3, 2, "AMD Athlon 64 X2 (Windsor JH-F2)"),
    FMSQ(0, 15, 4, 3, 3, amd_athlon_fx, "AMD Athlon 64 FX (Windsor JH-F3)"),
    FMSQ(0, 15, 4, 3, 3, amd_opteron,
         "AMD Dual-Core Opteron (Santa Ana JH-F3)"),
    FMS(0, 15, 4, 3, 3, "AMD Athlon 64 X2 (Windsor JH-F3)"),
    FM(0, 15, 4, 3, "AMD Athlon 64 X2 (Windsor)"),
    FMSQ(0, 15, 4, 8, 2, amd_turion,
         "AMD Turion 64 X2 (Taylor/Trinidad BH-F2)"),
    FMS(0, 15, 4, 8, 2, "AMD Athlon 64 X2 (Windsor BH-F2)"),
    FM(0, 15, 4, 8, "AMD Turion 64 X2 (Taylor/Trinidad)"),
    FMSQ(0, 15, 4, 11, 2, amd_athlon_fx, "AMD Athlon 64 FX (Windsor BH-F2)"),
    FMS(0, 15, 4, 11, 2, "AMD Athlon 64 X2 (Windsor BH-F2)"),
    FM(0, 15, 4, 11, "AMD Athlon 64 X2 (Windsor)"),
    FMSQ(0, 15, 4, 12, 2, mobile_sempron,
         "AMD mobile Sempron (Keene DH-F2)"),
    FMSQ(0, 15, 4, 12, 2, mobile_athlon,
         "AMD mobile Athlon 64 (Keene DH-F2)"),
    FMSQ(0, 15, 4, 12, 2, desktop_sempron, "AMD Sempron (Manila DH-F2)"),
    FMS(0, 15, 4, 12, 2, "AMD Athlon 64 (Orleans DH-F2)"),
    FM(0, 15, 4, 12, "AMD Athlon 64 (Orleans)"),
    FMSQ(0, 15, 4, 15, 2, desktop_sempron, "AMD Sempron (Manila DH-F2)"),
    FMS(0, 15, 4, 15, 2, "AMD Athlon 64 (Orleans DH-F2)"),
    FM(0, 15, 4, 15, "AMD Athlon 64 (Orleans)"),
    FMSQ(0, 15, 5, 13, 3, amd_opteron, "AMD Opteron (Santa Rosa JH-F3)"),
    FMS(0, 15, 5, 13, 3, "AMD Athlon 64 FX (Windsor JH-F3)"),
    FM(0, 15, 5, 13, "AMD Athlon 64 FX (Windsor)"),
    FMSQ(0, 15, 5, 15, 2, desktop_sempron, "AMD Sempron (Manila DH-F2)"),
    FMS(0, 15, 5, 15, 2, "AMD Athlon 64 (Orleans DH-F2)"),
    FMSQ(0, 15, 5, 15, 3, desktop_sempron, "AMD Sempron (Manila DH-F3)"),
    FMS(0, 15, 5, 15, 3, "AMD Athlon 64 (Orleans DH-F3)"),
    FM(0, 15, 5, 15, "AMD Athlon 64 (Orleans)"),
    FMSQ(0, 15, 6, 8, 1, amd_turion, "AMD Turion 64 X2 (Tyler BH-G1)"),
    FMS(0, 15, 6, 8, 1, "AMD Athlon 64 X2 (Tyler BH-G1)"),
    FMSQ(0, 15, 6, 8, 2, amd_turion, "AMD Turion 64 X2 (Tyler BH-G2)"),
    FMS(0, 15, 6, 8, 2, "AMD Athlon 64 X2 (Tyler BH-G2)"),
    FM(0, 15, 6, 8, "AMD Turion 64 X2 (Tyler)"),
    FMSQ(0, 15, 6, 11, 1, desktop_sempron,
         "AMD Sempron Dual Core (Brisbane BH-G1)"),
    FMSQ(0, 15, 6, 11, 1, desktop_athlon,
         "AMD Athlon 64 X2 (Brisbane BH-G1)"),
    FMS(0, 15, 6, 11, 1, "AMD Athlon X2 (Brisbane BH-G1)"),
    FMSQ(0, 15, 6, 11, 2, desktop_sempron,
         "AMD Sempron Dual Core (Brisbane BH-G2)"),
    FMSQ(0, 15, 6, 11, 2, amd_neo, "AMD Athlon Neo X2 (Conesus BH-G2)"),
    FMS(0, 15, 6, 11, 2, "AMD Athlon X2 (Brisbane BH-G2)"),
    FM(0, 15, 6, 11, "AMD Athlon 64 X2 (Brisbane)"),
    FMSQ(0, 15, 6, 12, 2, mobile_sempron,
         "AMD mobile Sempron (Sherman DH-G2)"),
    FMSQ(0, 15, 6, 12, 2, desktop_sempron, "AMD Sempron (Sparta DH-G2)"),
    FMS(0, 15, 6, 12, 2, "AMD Athlon 64 (Lima DH-G2)"),
    FM(0, 15, 6, 12, "AMD Athlon 64 (Lima)"),
    FMSQ(0, 15, 6, 15, 2, mobile_sempron,
         "AMD mobile Sempron (Sherman DH-G2)"),
    FMSQ(0, 15, 6, 15, 2, desktop_sempron, "AMD Sempron (Sparta DH-G2)"),
    FMSQ(0, 15, 6, 15, 2, amd_neo, "AMD Athlon Neo (Huron DH-G2)"),
    FMS(0, 15, 6, 15, 2, "AMD Athlon 64 (Lima DH-G2)"),
    FM(0, 15, 6, 15, "AMD Athlon 64 (Lima)"),
    FMSQ(0, 15, 7, 12, 2, mobile_sempron,
         "AMD mobile Sempron (Sherman DH-G2)"),
    FMSQ(0, 15, 7, 12, 2, desktop_sempron, "AMD Sempron (Sparta DH-G2)"),
    FMS(0, 15, 7, 12, 2, "AMD Athlon 64 (Lima DH-G2)"),
    FM(0, 15, 7, 12, "AMD Athlon 64 (Lima)"),
    FMSQ(0, 15, 7, 15, 1, desktop_sempron, "AMD Sempron (Sparta DH-G1)"),
    FMS(0, 15, 7, 15, 1, "AMD Athlon 64 (Lima DH-G1)"),
    FMSQ(0, 15, 7, 15, 2, desktop_sempron, "AMD Sempron (Sparta DH-G2)"),
    FMSQ(0, 15, 7, 15, 2, amd_neo, "AMD Athlon Neo (Huron DH-G2)"),
    FMS(0, 15, 7, 15, 2, "AMD Athlon 64 (Lima DH-G2)"),
    FM(0, 15, 7, 15, "AMD Athlon 64 (Lima)"),
    FMS(0, 15, 12, 1, 3, "AMD Athlon 64 FX (Windsor JH-F3)"),
    FM(0, 15, 12, 1, "AMD Athlon 64 FX (Windsor)"),
    F(0, 15, "AMD Opteron / Athlon 64 / Athlon 64 FX / Sempron / Turion"
             " (unknown model)"),

    # Family 0x10: K10
    FMS(1, 15, 0, 0, 0, "AMD Opteron (Barcelona DR-A0)"),
    FMS(1, 15, 0, 0, 1, "AMD Opteron (Barcelona DR-A1)"),
    FMS(1, 15, 0, 0, 2, "AMD Opteron (Barcelona DR-A2)"),
    FM(1, 15, 0, 0, "AMD Opteron (Barcelona)"),
    FMSQ(1, 15, 0, 2, 0, quad_core_opteron,
         "AMD Quad-Core Opteron (Barcelona DR-B0)"),
    FMSQ(1, 15, 0, 2, 1, quad_core_opteron,
         "AMD Quad-Core Opteron (Barcelona DR-B1)"),
    FMSQ(1, 15, 0, 2, 2, quad_core_opteron,
         "AMD Quad-Core Opteron (Barcelona DR-B2)"),
    FMSQ(1, 15, 0, 2, 2, triple_core,
         "AMD Phenom Triple-Core (Toliman DR-B2)"),
    FMSQ(1, 15, 0, 2, 2, amd_phenom, "AMD Phenom Quad-Core (Agena DR-B2)"),
    FMSQ(1, 15, 0, 2, 3, quad_core_opteron,
         "AMD Quad-Core Opteron (Barcelona DR-B3)"),
    FMSQ(1, 15, 0, 2, 3, triple_core,
         "AMD Phenom Triple-Core (Toliman DR-B3)"),
    FMSQ(1, 15, 0, 2, 3, dual_core, "AMD Athlon Dual-Core (Kuma DR-B3)"),
    FMSQ(1, 15, 0, 2, 3, amd_phenom, "AMD Phenom Quad-Core (Agena DR-B3)"),
    FMSQ(1, 15, 0, 2, 10, quad_core_opteron,
         "AMD Quad-Core Opteron (Barcelona DR-BA)"),
    FMQ(1, 15, 0, 2, amd_opteron, "AMD Quad-Core Opteron (Barcelona)"),
    FMQ(1, 15, 0, 2, triple_core, "AMD Phenom Triple-Core (Toliman)"),
    FM(1, 15, 0, 2, "AMD Phenom Quad-Core (Agena)"),
    FMSQ(1, 15, 0, 4, 2, quad_core_opteron,
         "AMD Quad-Core Opteron (Shanghai RB-C2)"),
    FMSQ(1, 15, 0, 4, 2, triple_core, "AMD Phenom II X3 (Heka RB-C2)"),
    FMSQ(1, 15, 0, 4, 2, dual_core, "AMD Phenom II X2 (Callisto RB-C2)"),
    FMS(1, 15, 0, 4, 2, "AMD Phenom II X4 (Deneb RB-C2)"),
    FMSQ(1, 15, 0, 4, 3, quad_core_opteron,
         "AMD Quad-Core Opteron (Suzuka RB-C3)"),
    FMSQ(1, 15, 0, 4, 3, amd_embedded,
         "AMD Phenom II X4 Embedded (Deneb RB-C3)"),
    FMSQ(1, 15, 0, 4, 3, triple_core, "AMD Phenom II X3 (Heka RB-C3)"),
    FMSQ(1, 15, 0, 4, 3, dual_core, "AMD Phenom II X2 (Callisto RB-C3)"),
    FMS(1, 15, 0, 4, 3, "AMD Phenom II X4 (Deneb RB-C3)"),
    FMQ(1, 15, 0, 4, amd_opteron, "AMD Quad-Core Opteron (Shanghai)"),
    FM(1, 15, 0, 4, "AMD Phenom II (Deneb/Heka/Callisto)"),
    FMSQ(1, 15, 0, 5, 2, triple_core, "AMD Athlon II X3 (Rana BL-C2)"),
    FMSQ(1, 15, 0, 5, 2, amd_phenom, "AMD Phenom II X4 (Zosma BL-C2)"),
    FMS(1, 15, 0, 5, 2, "AMD Athlon II X4 (Propus BL-C2)"),
    FMSQ(1, 15, 0, 5, 3, triple_core, "AMD Athlon II X3 (Rana BL-C3)"),
    FMSQ(1, 15, 0, 5, 3, amd_phenom, "AMD Phenom II X4 (Zosma BL-C3)"),
    FMSQ(1, 15, 0, 5, 3, amd_embedded,
         "AMD Athlon II X4 Embedded (Propus BL-C3)"),
    FMS(1, 15, 0, 5, 3, "AMD Athlon II X4 (Propus BL-C3)"),
    FM(1, 15, 0, 5, "AMD Athlon II X4 / X3 (Propus/Rana)"),
    FMSQ(1, 15, 0, 6, 2, desktop_sempron, "AMD Sempron (Sargas DA-C2)"),
    FMSQ(1, 15, 0, 6, 2, mobile_sempron,
         "AMD Sempron Mobile (Caspian DA-C2)"),
    FMSQ(1, 15, 0, 6, 2, amd_turion,
         "AMD Turion II Dual-Core Mobile (Caspian DA-C2)"),
    FMSQ(1, 15, 0, 6, 2, mobile_athlon,
         "AMD Athlon II Dual-Core Mobile (Caspian DA-C2)"),
    FMSQ(1, 15, 0, 6, 2, amd_phenom, "AMD Phenom II X2 (Regor DA-C2)"),
    FMS(1, 15, 0, 6, 2, "AMD Athlon II X2 (Regor DA-C2)"),
    FMSQ(1, 15, 0, 6, 3, desktop_sempron, "AMD Sempron (Sargas DA-C3)"),
    FMSQ(1, 15, 0, 6, 3, mobile_sempron,
         "AMD Sempron Mobile (Champlain DA-C3)"),
    FMSQ(1, 15, 0, 6, 3, amd_turion,
         "AMD Turion II Dual-Core Mobile (Champlain DA-C3)"),
    FMSQ(1, 15, 0, 6, 3, mobile_athlon,
         "AMD Athlon II Dual-Core Mobile (Champlain DA-C3)"),
    FMSQ(1, 15, 0, 6, 3, amd_phenom, "AMD Phenom II X2 (Regor DA-C3)"),
    FMSQ(1, 15, 0, 6, 3, amd_neo, "AMD Athlon II Neo (Geneva DA-C3)"),
    FMS(1, 15, 0, 6, 3, "AMD Athlon II X2 (Regor DA-C3)"),
    FMQ(1, 15, 0, 6, desktop_sempron, "AMD Sempron (Sargas)"),
    FM(1, 15, 0, 6, "AMD Athlon II X2 (Regor)"),
    FMSQ(1, 15, 0, 8, 0, six_core_opteron,
         "AMD Six-Core Opteron (Istanbul HY-D0)"),
    FMS(1, 15, 0, 8, 0, "AMD Opteron (Istanbul HY-D0)"),
    FMSQ(1, 15, 0, 8, 1, six_core_opteron,
         "AMD Opteron 4100 (Lisbon HY-D1)"),
    FMSQ(1, 15, 0, 8, 1, quad_core_opteron,
         "AMD Opteron 4100 (Lisbon HY-D1)"),
    FMS(1, 15, 0, 8, 1, "AMD Opteron 4100 (Lisbon HY-D1)"),
    FM(1, 15, 0, 8, "AMD Opteron (Istanbul/Lisbon)"),
    FMSQ(1, 15, 0, 9, 1, twelve_core_opteron,
         "AMD Opteron 6100 (Magny-Cours HY-D1)"),
    FMSQ(1, 15, 0, 9, 1, eight_core_opteron,
         "AMD Opteron 6100 (Magny-Cours HY-D1)"),
    FMS(1, 15, 0, 9, 1, "AMD Opteron 6100 (Magny-Cours HY-D1)"),
    FM(1, 15, 0, 9, "AMD Opteron 6100 (Magny-Cours)"),
    FMSQ(1, 15, 0, 10, 0, six_core, "AMD Phenom II X6 (Thuban PH-E0)"),
    FMSQ(1, 15, 0, 10, 0, amd_t_suffix, "AMD Phenom II X4 (Zosma PH-E0)"),
    FMS(1, 15, 0, 10, 0, "AMD Phenom II X6 / X4 (Thuban/Zosma PH-E0)"),
    FM(1, 15, 0, 10, "AMD Phenom II X6 / X4 (Thuban/Zosma)"),
    F(1, 15, "AMD Athlon / Phenom / Opteron / Sempron / Turion"
             " (unknown model)"),

    # Family 0x11: Griffin
    FMSQ(2, 15, 0, 3, 1, amd_ultra,
         "AMD Turion X2 Ultra Dual-Core Mobile (Griffin LG-B1)"),
    FMSQ(2, 15, 0, 3, 1, amd_turion,
         "AMD Turion X2 Dual-Core Mobile (Griffin LG-B1)"),
    FMSQ(2, 15, 0, 3, 1, mobile_sempron,
         "AMD Sempron Mobile (Sable LG-B1)"),
    FMS(2, 15, 0, 3, 1, "AMD Athlon X2 Dual-Core (Griffin LG-B1)"),
    FM(2, 15, 0, 3, "AMD Turion X2 / Athlon X2 / Sempron (Griffin)"),
    F(2, 15, "AMD Turion X2 / Athlon X2 / Sempron (unknown model)"),

    # Family 0x12: Llano
    FMSQ(3, 15, 0, 1, 0, amd_series,
         "AMD A-Series / E2-Series (Llano LN-B0)"),
    FMSQ(3, 15, 0, 1, 0, mobile_athlon, "AMD Athlon II Mobile (Llano LN-B0)"),
    FMS(3, 15, 0, 1, 0, "AMD Athlon II X2 / X4 (Llano LN-B0)"),
    FM(3, 15, 0, 1, "AMD A-Series / E2-Series / Athlon II (Llano)"),
    F(3, 15, "AMD A-Series / E2-Series (unknown model)"),

    # Family 0x14: Bobcat
    FMSQ(5, 15, 0, 1, 0, amd_embedded, "AMD G-Series (Ontario/Zacate ON-B0)"),
    FMS(5, 15, 0, 1, 0, "AMD C-Series / E-Series / Z-Series"
                        " (Ontario/Zacate ON-B0)"),
    FM(5, 15, 0, 1, "AMD C-Series / E-Series / G-Series / Z-Series"
                    " (Ontario/Zacate)"),
    FMSQ(5, 15, 0, 2, 0, amd_embedded, "AMD G-Series (Ontario/Zacate ON-C0)"),
    FMS(5, 15, 0, 2, 0, "AMD C-Series / E-Series / Z-Series"
                        " (Ontario/Zacate/Desna ON-C0)"),
    FM(5, 15, 0, 2, "AMD C-Series / E-Series / Z-Series"
                    " (Ontario/Zacate/Desna)"),
    F(5, 15, "AMD C-Series / E-Series / G-Series / Z-Series"
             " (unknown model)"),

    # Family 0x15: Bulldozer, Piledriver, Steamroller, Excavator
    FM(6, 15, 0, 0, "AMD FX (Zambezi)"),
    FMSQ(6, 15, 0, 1, 2, sixteen_core_opteron,
         "AMD Opteron 6200 (Interlagos OR-B2)"),
    FMSQ(6, 15, 0, 1, 2, amd_opteron,
         "AMD Opteron 6200 / 4200 / 3200 (Interlagos/Valencia/Zurich"
         " OR-B2)"),
    FMSQ(6, 15, 0, 1, 2, amd_fx, "AMD FX-Series (Zambezi OR-B2)"),
    FMS(6, 15, 0, 1, 2, "AMD FX / Opteron (Zambezi/Interlagos OR-B2)"),
    FMQ(6, 15, 0, 1, amd_opteron,
        "AMD Opteron 6200 / 4200 / 3200 (Interlagos/Valencia/Zurich)"),
    FM(6, 15, 0, 1, "AMD FX-Series (Zambezi)"),
    FMSQ(6, 15, 0, 2, 0, amd_opteron,
         "AMD Opteron 6300 / 4300 / 3300 (Abu Dhabi/Seoul/Delhi"
         " OR-C0)"),
    FMSQ(6, 15, 0, 2, 0, amd_fx, "AMD FX-Series (Vishera OR-C0)"),
    FMS(6, 15, 0, 2, 0, "AMD FX / Opteron (Vishera/Abu Dhabi OR-C0)"),
    FMQ(6, 15, 0, 2, amd_opteron,
        "AMD Opteron 6300 / 4300 / 3300 (Abu Dhabi/Seoul/Delhi)"),
    FM(6, 15, 0, 2, "AMD FX-Series (Vishera)"),
    FMSQ(6, 15, 1, 0, 1, amd_firepro, "AMD FirePro APU (Trinity TN-A1)"),
    FMSQ(6, 15, 1, 0, 1, amd_opteron, "AMD Opteron 3300 (Delhi TN-A1)"),
    FMSQ(6, 15, 1, 0, 1, amd_series, "AMD A-Series (Trinity TN-A1)"),
    FMS(6, 15, 1, 0, 1, "AMD Athlon / Sempron / FX (Trinity TN-A1)"),
    FM(6, 15, 1, 0, "AMD A-Series (Trinity)"),
    FMSQ(6, 15, 1, 3, 1, amd_series, "AMD A-Series (Richland RL-A1)"),
    FMS(6, 15, 1, 3, 1, "AMD Athlon / Sempron (Richland RL-A1)"),
    FM(6, 15, 1, 3, "AMD A-Series (Richland)"),
    FMSQ(6, 15, 3, 0, 1, amd_firepro, "AMD FirePro APU (Kaveri KV-A1)"),
    FMSQ(6, 15, 3, 0, 1, amd_series, "AMD A-Series (Kaveri KV-A1)"),
    FMS(6, 15, 3, 0, 1, "AMD Athlon X4 (Kaveri KV-A1)"),
    FM(6, 15, 3, 0, "AMD A-Series (Kaveri)"),
    FMS(6, 15, 3, 8, 1, "AMD A-Series / Athlon X4 (Godavari KV-A1)"),
    FM(6, 15, 3, 8, "AMD A-Series (Godavari)"),
    FMSQ(6, 15, 6, 0, 1, amd_embedded, "AMD R-Series (Bald Eagle CZ-A1)"),
    FMS(6, 15, 6, 0, 1, "AMD A-Series / FX (Carrizo CZ-A1)"),
    FM(6, 15, 6, 0, "AMD A-Series (Carrizo)"),
    FMSQ(6, 15, 6, 5, 1, amd_embedded, "AMD Merlin Falcon (CZ-A1)"),
    FMS(6, 15, 6, 5, 1, "AMD A-Series / FX (Bristol Ridge BR-A1)"),
    FM(6, 15, 6, 5, "AMD A-Series (Bristol Ridge)"),
    FMS(6, 15, 7, 0, 0, "AMD A-Series (Stoney Ridge ST-A0)"),
    FM(6, 15, 7, 0, "AMD A-Series / E-Series (Stoney Ridge)"),
    F(6, 15, "AMD FX / Opteron / A-Series (unknown model)"),

    # Family 0x16: Jaguar, Puma
    FMSQ(7, 15, 0, 0, 1, amd_opteron, "AMD Opteron X1100 (Kyoto KB-A1)"),
    FMSQ(7, 15, 0, 0, 1, amd_embedded, "AMD G-Series (Steppe Eagle KB-A1)"),
    FMSQ(7, 15, 0, 0, 1, amd_series,
         "AMD A-Series / E-Series (Kabini/Temash KB-A1)"),
    FMS(7, 15, 0, 0, 1, "AMD Athlon / Sempron (Kabini KB-A1)"),
    FM(7, 15, 0, 0, "AMD A-Series / E-Series (Kabini/Temash)"),
    FMSQ(7, 15, 3, 0, 1, amd_opteron, "AMD Opteron X2100 (Kyoto ML-A1)"),
    FMSQ(7, 15, 3, 0, 1, amd_embedded, "AMD G-Series (Crowned Eagle ML-A1)"),
    FMS(7, 15, 3, 0, 1, "AMD A-Series / E-Series (Beema/Mullins ML-A1)"),
    FM(7, 15, 3, 0, "AMD A-Series / E-Series (Beema/Mullins)"),
    F(7, 15, "AMD Athlon / Sempron / A-Series / E-Series (unknown model)"),

    # Family 0x17: Zen, Zen+, Zen 2
    FMSQ(8, 15, 0, 1, 1, amd_epyc, "AMD EPYC (Naples B1)"),
    FMSQ(8, 15, 0, 1, 1, desktop_ryzen, "AMD Ryzen (Summit Ridge B1)"),
    FMSQ(8, 15, 0, 1, 1, amd_ryzen, "AMD Ryzen Threadripper"
                                     " (Whitehaven B1)"),
    FMS(8, 15, 0, 1, 1, "AMD Ryzen / EPYC (Summit Ridge/Naples B1)"),
    FMSQ(8, 15, 0, 1, 2, amd_epyc, "AMD EPYC (Naples B2)"),
    FMSQ(8, 15, 0, 1, 2, amd_ryzen, "AMD Ryzen (Summit Ridge B2)"),
    FMS(8, 15, 0, 1, 2, "AMD Ryzen / EPYC (Summit Ridge/Naples B2)"),
    FMQ(8, 15, 0, 1, amd_epyc, "AMD EPYC (Naples)"),
    FM(8, 15, 0, 1, "AMD Ryzen (Summit Ridge)"),
    FMQ(8, 15, 0, 8, amd_ryzen, "AMD Ryzen (Pinnacle Ridge)"),
    FM(8, 15, 0, 8, "AMD Ryzen / Athlon (Pinnacle Ridge)"),
    FMQ(8, 15, 1, 1, mobile_ryzen, "AMD Ryzen Mobile (Raven Ridge)"),
    FMQ(8, 15, 1, 1, amd_embedded, "AMD Ryzen Embedded (Great Horned Owl)"),
    FM(8, 15, 1, 1, "AMD Ryzen / Athlon (Raven Ridge)"),
    FMQ(8, 15, 1, 8, mobile_ryzen, "AMD Ryzen Mobile (Picasso)"),
    FM(8, 15, 1, 8, "AMD Ryzen / Athlon (Picasso)"),
    FMQ(8, 15, 2, 0, mobile_ryzen, "AMD Ryzen Mobile (Dali)"),
    FM(8, 15, 2, 0, "AMD Athlon (Dali)"),
    FMQ(8, 15, 3, 1, amd_epyc, "AMD EPYC (Rome)"),
    FM(8, 15, 3, 1, "AMD Ryzen Threadripper (Castle Peak)"),
    FM(8, 15, 4, 7, "AMD 4700S Desktop Kit (Ariel)"),
    FMQ(8, 15, 6, 0, mobile_ryzen, "AMD Ryzen Mobile (Renoir)"),
    FM(8, 15, 6, 0, "AMD Ryzen (Renoir)"),
    FM(8, 15, 6, 8, "AMD Ryzen (Lucienne)"),
    FM(8, 15, 7, 1, "AMD Ryzen (Matisse)"),
    FM(8, 15, 9, 0, "AMD Custom APU (Van Gogh)"),
    FM(8, 15, 10, 0, "AMD Ryzen (Mendocino)"),
    FMQ(8, 15, 0, 2, amd_epyc_3000, "AMD EPYC 3000 (Snowy Owl)"),
    F(8, 15, "AMD Ryzen / EPYC (unknown model)"),

    # Family 0x19: Zen 3, Zen 4
    FMQ(10, 15, 0, 1, amd_epyc, "AMD EPYC (Milan)"),
    FM(10, 15, 0, 1, "AMD Ryzen Threadripper PRO (Chagall)"),
    FM(10, 15, 0, 8, "AMD Ryzen Threadripper (Chagall)"),
    FMQ(10, 15, 1, 1, amd_epyc, "AMD EPYC (Genoa)"),
    FM(10, 15, 1, 1, "AMD EPYC (Genoa)"),
    FMQ(10, 15, 1, 8, amd_ryzen, "AMD Ryzen Threadripper 7000"
                                 " (Storm Peak)"),
    FM(10, 15, 1, 8, "AMD Ryzen Threadripper (Storm Peak)"),
    FM(10, 15, 2, 1, "AMD Ryzen (Vermeer)"),
    FMQ(10, 15, 4, 4, mobile_ryzen, "AMD Ryzen Mobile (Rembrandt)"),
    FM(10, 15, 4, 4, "AMD Ryzen (Rembrandt)"),
    FMQ(10, 15, 5, 0, mobile_ryzen, "AMD Ryzen Mobile (Cezanne/Barcelo)"),
    FM(10, 15, 5, 0, "AMD Ryzen (Cezanne)"),
    FM(10, 15, 6, 1, "AMD Ryzen (Raphael)"),
    FMQ(10, 15, 7, 4, mobile_ryzen, "AMD Ryzen Mobile (Phoenix)"),
    FM(10, 15, 7, 4, "AMD Ryzen (Phoenix)"),
    FM(10, 15, 7, 8, "AMD Ryzen (Phoenix 2)"),
    FMQ(10, 15, 10, 0, amd_epyc, "AMD EPYC (Bergamo/Siena)"),
    FM(10, 15, 10, 0, "AMD EPYC (Bergamo/Siena)"),
    F(10, 15, "AMD Ryzen / EPYC (unknown model)"),

    # Family 0x1a: Zen 5
    FMQ(11, 15, 0, 2, amd_epyc, "AMD EPYC (Turin)"),
    FM(11, 15, 0, 2, "AMD EPYC (Turin)"),
    FM(11, 15, 1, 1, "AMD EPYC (Turin Dense)"),
    FM(11, 15, 2, 4, "AMD Ryzen AI (Strix Point)"),
    FM(11, 15, 4, 4, "AMD Ryzen (Granite Ridge)"),
    FM(11, 15, 6, 0, "AMD Ryzen AI (Krackan Point)"),
    FM(11, 15, 7, 0, "AMD Ryzen AI (Strix Halo)"),
    F(11, 15, "AMD Ryzen / EPYC (unknown model)"),
]

AMD_TABLE = RuleTable("amd", AMD_RULES, default="unknown")
