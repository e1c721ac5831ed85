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
:mod:`cpuid_decoder.tables.intel` -- Intel model names
======================================================

Model names by signature, from the Intel specification updates of each
processor family. Steppings are given as Intel's letter+digit codes.
Within one signature the rules go from the most qualified (stepping and
brand) to the least qualified, and the family-only rules at the end of
each family catch models that are not listed.
"""

from cpuid_decoder.predicates import (
    desktop_atom,
    desktop_celeron,
    desktop_core,
    desktop_pentium,
    intel_cc150,
    intel_extreme,
    intel_g_line,
    intel_generic,
    intel_i_10000,
    intel_i_8000,
    intel_pentium_d,
    intel_pentium_m,
    intel_scalable,
    intel_xeon,
    intel_xeon_mp,
    intel_y_line,
    mobile_atom,
    mobile_celeron,
    mobile_core,
    mobile_pentium,
    netburst_xeon_l3,
    p6_celeron,
    p6_pentium,
    p6_xeon,
)
from cpuid_decoder.rules import (
    F,
    FM,
    FMQ,
    FMS,
    FMSQ,
    RuleTable,
)


INTEL_RULES = [
    # Family 4: i486
    FMS(0, 4, 0, 0, 0, "Intel i80486DX-25/33, A0-step"),
    FMS(0, 4, 0, 0, 1, "Intel i80486DX-25/33, B-step"),
    FM(0, 4, 0, 0, "Intel i80486DX-25/33"),
    FM(0, 4, 0, 1, "Intel i80486DX-50"),
    FM(0, 4, 0, 2, "Intel i80486SX"),
    FM(0, 4, 0, 3, "Intel i80486DX/2"),
    FM(0, 4, 0, 4, "Intel i80486SL"),
    FM(0, 4, 0, 5, "Intel i80486SX/2"),
    FM(0, 4, 0, 7, "Intel i80486DX/2-WB"),
    FM(0, 4, 0, 8, "Intel i80486DX/4"),
    FM(0, 4, 0, 9, "Intel i80486DX/4-WB"),
    F(0, 4, "Intel i80486 (unknown model)"),

    # Family 5: Pentium, Pentium MMX, Quark
    FM(0, 5, 0, 0, "Intel Pentium 60/66 A-step"),
    FMS(0, 5, 0, 1, 3, "Intel Pentium 60/66 (P5 B1)"),
    FMS(0, 5, 0, 1, 5, "Intel Pentium 60/66 (P5 C1)"),
    FMS(0, 5, 0, 1, 7, "Intel Pentium 60/66 (P5 D1)"),
    FM(0, 5, 0, 1, "Intel Pentium 60/66 (P5)"),
    FMS(0, 5, 0, 2, 1, "Intel Pentium 75 - 200 (P54C B1)"),
    FMS(0, 5, 0, 2, 2, "Intel Pentium 75 - 200 (P54C B3)"),
    FMS(0, 5, 0, 2, 4, "Intel Pentium 75 - 200 (P54C B5)"),
    FMS(0, 5, 0, 2, 5, "Intel Pentium 75 - 200 (P54C C2/mA1)"),
    FMS(0, 5, 0, 2, 6, "Intel Pentium 75 - 200 (P54C E0)"),
    FMS(0, 5, 0, 2, 11, "Intel Pentium 75 - 200 (P54C cB1)"),
    FMS(0, 5, 0, 2, 12, "Intel Pentium 75 - 200 (P54C cC0)"),
    FM(0, 5, 0, 2, "Intel Pentium 75 - 200 (P54C)"),
    FMS(0, 5, 0, 3, 1, "Intel Pentium OverDrive for P54C/i486 (P24T B1)"),
    FMS(0, 5, 0, 3, 2, "Intel Pentium OverDrive for P54C/i486 (P24T B2)"),
    FM(0, 5, 0, 3, "Intel Pentium OverDrive for P54C/i486 (P24T)"),
    FMS(0, 5, 0, 4, 1, "Intel Pentium MMX (P55C A1)"),
    FMS(0, 5, 0, 4, 3, "Intel Pentium MMX (P55C B1)"),
    FMS(0, 5, 0, 4, 4, "Intel Pentium MMX (P55C A3)"),
    FM(0, 5, 0, 4, "Intel Pentium MMX (P55C)"),
    FMS(0, 5, 0, 7, 0, "Intel Mobile Pentium 75 - 200 (P54C mA4)"),
    FM(0, 5, 0, 7, "Intel Mobile Pentium 75 - 200 (P54C)"),
    FMS(0, 5, 0, 8, 1, "Intel Mobile Pentium MMX (Tillamook mxA3)"),
    FMS(0, 5, 0, 8, 2, "Intel Mobile Pentium MMX (Tillamook myA0)"),
    FM(0, 5, 0, 8, "Intel Mobile Pentium MMX (Tillamook)"),
    FMS(0, 5, 0, 9, 0, "Intel Quark X1000 / D1000 / D2000 / C1000"
                       " (Lakemont A0)"),
    FM(0, 5, 0, 9, "Intel Quark X1000 / D1000 / D2000 / C1000 (Lakemont)"),
    FM(0, 5, 0, 10, "Intel Quark SE (Lakemont)"),
    F(0, 5, "Intel Pentium (unknown model)"),

    # Family 6: P6
    FM(0, 6, 0, 0, "Intel Pentium Pro A-step"),
    FMS(0, 6, 0, 1, 1, "Intel Pentium Pro (P6 B0)"),
    FMS(0, 6, 0, 1, 2, "Intel Pentium Pro (P6 C0)"),
    FMS(0, 6, 0, 1, 6, "Intel Pentium Pro (P6 sA0)"),
    FMS(0, 6, 0, 1, 7, "Intel Pentium Pro (P6 sA1)"),
    FMS(0, 6, 0, 1, 9, "Intel Pentium Pro (P6 sB1)"),
    FM(0, 6, 0, 1, "Intel Pentium Pro (P6)"),
    FMS(0, 6, 0, 3, 2, "Intel Pentium II OverDrive (TdB0)"),
    FMS(0, 6, 0, 3, 3, "Intel Pentium II (Klamath C0)"),
    FMS(0, 6, 0, 3, 4, "Intel Pentium II (Klamath C1)"),
    FM(0, 6, 0, 3, "Intel Pentium II (Klamath)"),
    FM(0, 6, 0, 4, "Intel Pentium P55CT OverDrive (Deschutes)"),
    FMSQ(0, 6, 0, 5, 0, p6_celeron, "Intel Celeron (Covington dA0)"),
    FMSQ(0, 6, 0, 5, 0, p6_xeon, "Intel Pentium II Xeon (Deschutes dA0)"),
    FMSQ(0, 6, 0, 5, 0, mobile_pentium,
         "Intel Mobile Pentium II (Tonga dA0)"),
    FMS(0, 6, 0, 5, 0, "Intel Pentium II (Deschutes dA0)"),
    FMSQ(0, 6, 0, 5, 1, p6_celeron, "Intel Celeron (Covington dA1)"),
    FMSQ(0, 6, 0, 5, 1, p6_xeon, "Intel Pentium II Xeon (Deschutes dA1)"),
    FMS(0, 6, 0, 5, 1, "Intel Pentium II (Deschutes dA1)"),
    FMSQ(0, 6, 0, 5, 2, p6_celeron, "Intel Celeron (Covington dB0)"),
    FMSQ(0, 6, 0, 5, 2, p6_xeon, "Intel Pentium II Xeon (Deschutes dB0)"),
    FMSQ(0, 6, 0, 5, 2, mobile_pentium,
         "Intel Mobile Pentium II (Tonga dB0)"),
    FMS(0, 6, 0, 5, 2, "Intel Pentium II (Deschutes dB0)"),
    FMSQ(0, 6, 0, 5, 3, p6_xeon, "Intel Pentium II Xeon (Deschutes dB1)"),
    FMS(0, 6, 0, 5, 3, "Intel Pentium II (Deschutes dB1)"),
    FMQ(0, 6, 0, 5, p6_celeron, "Intel Celeron (Covington)"),
    FMQ(0, 6, 0, 5, p6_xeon, "Intel Pentium II Xeon (Deschutes)"),
    FM(0, 6, 0, 5, "Intel Pentium II (Deschutes)"),
    FMSQ(0, 6, 0, 6, 0, mobile_pentium, "Intel Mobile Pentium II (Dixon mA0)"),
    FMS(0, 6, 0, 6, 0, "Intel Celeron-A (Mendocino A0)"),
    FMS(0, 6, 0, 6, 5, "Intel Celeron-A (Mendocino B0)"),
    FMSQ(0, 6, 0, 6, 10, mobile_pentium,
         "Intel Mobile Pentium II (Dixon mdA0)"),
    FMS(0, 6, 0, 6, 10, "Intel Mobile Celeron (Dixon mdA0)"),
    FMQ(0, 6, 0, 6, mobile_pentium, "Intel Mobile Pentium II (Dixon)"),
    FM(0, 6, 0, 6, "Intel Celeron-A (Mendocino)"),
    FMSQ(0, 6, 0, 7, 2, p6_xeon, "Intel Pentium III Xeon (Tanner kB0)"),
    FMS(0, 6, 0, 7, 2, "Intel Pentium III (Katmai kB0)"),
    FMSQ(0, 6, 0, 7, 3, p6_xeon, "Intel Pentium III Xeon (Tanner kC0)"),
    FMS(0, 6, 0, 7, 3, "Intel Pentium III (Katmai kC0)"),
    FMQ(0, 6, 0, 7, p6_xeon, "Intel Pentium III Xeon (Tanner)"),
    FM(0, 6, 0, 7, "Intel Pentium III (Katmai)"),
    FMSQ(0, 6, 0, 8, 1, p6_celeron, "Intel Celeron (Coppermine-128 cA2)"),
    FMSQ(0, 6, 0, 8, 1, mobile_pentium,
         "Intel Mobile Pentium III (Coppermine cA2)"),
    FMSQ(0, 6, 0, 8, 1, p6_xeon, "Intel Pentium III Xeon (Cascades cA2)"),
    FMS(0, 6, 0, 8, 1, "Intel Pentium III (Coppermine cA2)"),
    FMSQ(0, 6, 0, 8, 3, p6_celeron, "Intel Celeron (Coppermine-128 cB0)"),
    FMSQ(0, 6, 0, 8, 3, mobile_pentium,
         "Intel Mobile Pentium III (Coppermine cB0)"),
    FMSQ(0, 6, 0, 8, 3, p6_xeon, "Intel Pentium III Xeon (Cascades cB0)"),
    FMS(0, 6, 0, 8, 3, "Intel Pentium III (Coppermine cB0)"),
    FMSQ(0, 6, 0, 8, 6, p6_celeron, "Intel Celeron (Coppermine-128 cC0)"),
    FMSQ(0, 6, 0, 8, 6, mobile_pentium,
         "Intel Mobile Pentium III (Coppermine cC0)"),
    FMSQ(0, 6, 0, 8, 6, p6_xeon, "Intel Pentium III Xeon (Cascades cC0)"),
    FMS(0, 6, 0, 8, 6, "Intel Pentium III (Coppermine cC0)"),
    FMSQ(0, 6, 0, 8, 10, p6_celeron, "Intel Celeron (Coppermine-128 cD0)"),
    FMSQ(0, 6, 0, 8, 10, mobile_celeron,
         "Intel Mobile Celeron (Coppermine-128 cD0)"),
    FMSQ(0, 6, 0, 8, 10, mobile_pentium,
         "Intel Mobile Pentium III (Coppermine cD0)"),
    FMSQ(0, 6, 0, 8, 10, p6_xeon, "Intel Pentium III Xeon (Cascades cD0)"),
    FMS(0, 6, 0, 8, 10, "Intel Pentium III (Coppermine cD0)"),
    FMQ(0, 6, 0, 8, p6_celeron, "Intel Celeron (Coppermine-128)"),
    FMQ(0, 6, 0, 8, p6_xeon, "Intel Pentium III Xeon (Cascades)"),
    FM(0, 6, 0, 8, "Intel Pentium III (Coppermine)"),
    FMSQ(0, 6, 0, 9, 5, mobile_celeron, "Intel Celeron M (Banias B1)"),
    FMSQ(0, 6, 0, 9, 5, intel_pentium_m, "Intel Pentium M (Banias B1)"),
    FMS(0, 6, 0, 9, 5, "Intel Pentium M / Celeron M (Banias B1)"),
    FMQ(0, 6, 0, 9, mobile_celeron, "Intel Celeron M (Banias)"),
    FM(0, 6, 0, 9, "Intel Pentium M (Banias)"),
    FMS(0, 6, 0, 10, 0, "Intel Pentium III Xeon (Cascades A0)"),
    FMS(0, 6, 0, 10, 1, "Intel Pentium III Xeon (Cascades A1)"),
    FMS(0, 6, 0, 10, 4, "Intel Pentium III Xeon (Cascades B0)"),
    FM(0, 6, 0, 10, "Intel Pentium III Xeon (Cascades)"),
    FMSQ(0, 6, 0, 11, 1, p6_celeron, "Intel Celeron (Tualatin-256 tA1)"),
    FMSQ(0, 6, 0, 11, 1, mobile_pentium,
         "Intel Mobile Pentium III-M (Tualatin tA1)"),
    FMSQ(0, 6, 0, 11, 1, p6_pentium,
         "Intel Pentium III / Pentium III-S (Tualatin tA1)"),
    FMS(0, 6, 0, 11, 1, "Intel Pentium III (Tualatin tA1)"),
    FMSQ(0, 6, 0, 11, 4, p6_celeron, "Intel Celeron (Tualatin-256 tB1)"),
    FMSQ(0, 6, 0, 11, 4, mobile_celeron,
         "Intel Mobile Celeron (Tualatin-256 tB1)"),
    FMSQ(0, 6, 0, 11, 4, mobile_pentium,
         "Intel Mobile Pentium III-M (Tualatin tB1)"),
    FMS(0, 6, 0, 11, 4, "Intel Pentium III / Pentium III-S (Tualatin tB1)"),
    FMQ(0, 6, 0, 11, p6_celeron, "Intel Celeron (Tualatin-256)"),
    FM(0, 6, 0, 11, "Intel Pentium III (Tualatin)"),
    FMSQ(0, 6, 0, 13, 6, mobile_celeron, "Intel Celeron M (Dothan B1)"),
    FMS(0, 6, 0, 13, 6, "Intel Pentium M (Dothan B1)"),
    FMSQ(0, 6, 0, 13, 8, mobile_celeron, "Intel Celeron M (Dothan C0)"),
    FMSQ(0, 6, 0, 13, 8, intel_xeon, "Intel Xeon LV (Dothan C0)"),
    FMS(0, 6, 0, 13, 8, "Intel Pentium M (Dothan C0)"),
    FMQ(0, 6, 0, 13, mobile_celeron, "Intel Celeron M (Dothan)"),
    FM(0, 6, 0, 13, "Intel Pentium M (Dothan)"),
    FMSQ(0, 6, 0, 14, 8, intel_xeon, "Intel Xeon LV (Sossaman C0)"),
    FMSQ(0, 6, 0, 14, 8, mobile_celeron, "Intel Celeron M (Yonah C0)"),
    FMSQ(0, 6, 0, 14, 8, mobile_pentium,
         "Intel Pentium Dual-Core Mobile T2000 (Yonah C0)"),
    FMSQ(0, 6, 0, 14, 8, intel_generic,
         "Intel Core Solo / Core Duo (Yonah C0, engineering sample)"),
    FMS(0, 6, 0, 14, 8, "Intel Core Solo / Core Duo (Yonah C0)"),
    FMSQ(0, 6, 0, 14, 12, intel_xeon, "Intel Xeon LV (Sossaman D0)"),
    FMSQ(0, 6, 0, 14, 12, mobile_celeron, "Intel Celeron M (Yonah D0)"),
    FMSQ(0, 6, 0, 14, 12, mobile_pentium,
         "Intel Pentium Dual-Core Mobile T2000 (Yonah D0)"),
    FMS(0, 6, 0, 14, 12, "Intel Core Solo / Core Duo (Yonah D0)"),
    FMS(0, 6, 0, 14, 13, "Intel Core Duo (Yonah M0)"),
    FMQ(0, 6, 0, 14, intel_xeon, "Intel Xeon LV (Sossaman)"),
    FMQ(0, 6, 0, 14, mobile_celeron, "Intel Celeron M (Yonah)"),
    FM(0, 6, 0, 14, "Intel Core Solo / Core Duo (Yonah)"),
    FMSQ(0, 6, 0, 15, 2, intel_xeon,
         "Intel Dual-Core Xeon 3000 / 5100 (Conroe/Woodcrest L2)"),
    FMSQ(0, 6, 0, 15, 2, mobile_core, "Intel Core 2 Duo Mobile (Merom L2)"),
    FMSQ(0, 6, 0, 15, 2, desktop_pentium,
         "Intel Pentium Dual-Core E2000 (Allendale L2)"),
    FMSQ(0, 6, 0, 15, 2, desktop_celeron, "Intel Celeron (Conroe-L L2)"),
    FMS(0, 6, 0, 15, 2, "Intel Core 2 Duo (Conroe/Allendale L2)"),
    FMSQ(0, 6, 0, 15, 4, intel_xeon,
         "Intel Dual-Core Xeon 5100 (Woodcrest B0)"),
    FMS(0, 6, 0, 15, 4, "Intel Core 2 Duo (Conroe B0)"),
    FMSQ(0, 6, 0, 15, 5, intel_xeon,
         "Intel Dual-Core Xeon 3000 (Conroe B1)"),
    FMS(0, 6, 0, 15, 5, "Intel Core 2 Duo (Conroe B1)"),
    FMSQ(0, 6, 0, 15, 6, intel_xeon,
         "Intel Dual-Core Xeon 3000 / 5100 (Conroe/Woodcrest B2)"),
    FMSQ(0, 6, 0, 15, 6, mobile_core, "Intel Core 2 Duo Mobile (Merom B2)"),
    FMSQ(0, 6, 0, 15, 6, intel_extreme, "Intel Core 2 Extreme (Conroe B2)"),
    FMSQ(0, 6, 0, 15, 6, desktop_pentium,
         "Intel Pentium Dual-Core E2000 (Allendale B2)"),
    FMS(0, 6, 0, 15, 6, "Intel Core 2 Duo (Conroe/Allendale B2)"),
    FMSQ(0, 6, 0, 15, 7, intel_xeon,
         "Intel Quad-Core Xeon 3200 / 5300 (Kentsfield/Clovertown B3)"),
    FMSQ(0, 6, 0, 15, 7, intel_extreme,
         "Intel Core 2 Extreme Quad-Core (Kentsfield B3)"),
    FMS(0, 6, 0, 15, 7, "Intel Core 2 Quad (Kentsfield B3)"),
    FMSQ(0, 6, 0, 15, 10, mobile_core, "Intel Core 2 Duo Mobile (Merom E1)"),
    FMSQ(0, 6, 0, 15, 10, mobile_celeron, "Intel Celeron M (Merom E1)"),
    FMS(0, 6, 0, 15, 10, "Intel Core 2 Duo Mobile (Merom E1)"),
    FMSQ(0, 6, 0, 15, 11, intel_xeon_mp,
         "Intel Xeon 7200 / 7300 (Tigerton G0)"),
    FMSQ(0, 6, 0, 15, 11, intel_xeon,
         "Intel Xeon 3000 / 3200 / 5100 / 5300 (Conroe/Kentsfield"
         "/Woodcrest/Clovertown G0)"),
    FMSQ(0, 6, 0, 15, 11, mobile_core, "Intel Core 2 Duo Mobile (Merom G2)"),
    FMSQ(0, 6, 0, 15, 11, intel_extreme,
         "Intel Core 2 Extreme Quad-Core (Kentsfield G0)"),
    FMSQ(0, 6, 0, 15, 11, desktop_pentium,
         "Intel Pentium Dual-Core E2000 (Allendale G0)"),
    FMSQ(0, 6, 0, 15, 11, desktop_celeron,
         "Intel Celeron Dual-Core E1000 (Allendale G0)"),
    FMS(0, 6, 0, 15, 11, "Intel Core 2 Duo / Core 2 Quad"
                         " (Conroe/Kentsfield G0)"),
    FMSQ(0, 6, 0, 15, 13, intel_xeon, "Intel Xeon 3000 (Conroe M0)"),
    FMSQ(0, 6, 0, 15, 13, mobile_core, "Intel Core 2 Duo Mobile (Merom M0)"),
    FMSQ(0, 6, 0, 15, 13, mobile_celeron,
         "Intel Celeron Dual-Core Mobile T1000 (Merom M0)"),
    FMSQ(0, 6, 0, 15, 13, mobile_pentium,
         "Intel Pentium Dual-Core Mobile T2000 (Merom M0)"),
    FMSQ(0, 6, 0, 15, 13, desktop_pentium,
         "Intel Pentium Dual-Core E2000 (Allendale M0)"),
    FMSQ(0, 6, 0, 15, 13, desktop_celeron,
         "Intel Celeron Dual-Core E1000 (Allendale M0)"),
    FMS(0, 6, 0, 15, 13, "Intel Core 2 Duo (Allendale M0)"),
    FMQ(0, 6, 0, 15, intel_xeon_mp, "Intel Xeon 7200 / 7300 (Tigerton)"),
    FMQ(0, 6, 0, 15, intel_xeon, "Intel Xeon (Conroe/Kentsfield/Woodcrest"
                                 "/Clovertown)"),
    FMQ(0, 6, 0, 15, mobile_core, "Intel Core 2 Duo Mobile (Merom)"),
    FM(0, 6, 0, 15, "Intel Core 2 Duo / Core 2 Quad (Conroe/Kentsfield)"),
    FM(0, 6, 1, 5, "Intel EP80579 (Tolapai)"),
    FMSQ(0, 6, 1, 6, 1, mobile_celeron, "Intel Celeron M 500 (Merom-L A1)"),
    FMS(0, 6, 1, 6, 1, "Intel Celeron 400 (Conroe-L A1)"),
    FMQ(0, 6, 1, 6, mobile_celeron, "Intel Celeron M 500 (Merom-L)"),
    FM(0, 6, 1, 6, "Intel Celeron 400 / 500 (Conroe-L/Merom-L)"),
    FMSQ(0, 6, 1, 7, 6, intel_xeon,
         "Intel Xeon 3100 / 3300 / 5200 / 5400"
         " (Wolfdale/Yorkfield/Harpertown C0)"),
    FMSQ(0, 6, 1, 7, 6, mobile_core, "Intel Core 2 Duo Mobile (Penryn C0)"),
    FMSQ(0, 6, 1, 7, 6, intel_extreme,
         "Intel Core 2 Extreme (Yorkfield C0)"),
    FMS(0, 6, 1, 7, 6, "Intel Core 2 Duo / Core 2 Quad"
                       " (Wolfdale/Yorkfield C0)"),
    FMSQ(0, 6, 1, 7, 7, intel_xeon,
         "Intel Xeon 3300 / 5400 (Yorkfield/Harpertown C1)"),
    FMSQ(0, 6, 1, 7, 7, intel_extreme,
         "Intel Core 2 Extreme (Yorkfield C1)"),
    FMS(0, 6, 1, 7, 7, "Intel Core 2 Quad (Yorkfield C1)"),
    FMSQ(0, 6, 1, 7, 10, intel_xeon,
         "Intel Xeon 3100 / 3300 / 5200 / 5400"
         " (Wolfdale/Yorkfield/Harpertown E0)"),
    FMSQ(0, 6, 1, 7, 10, mobile_core, "Intel Core 2 Duo Mobile (Penryn E0)"),
    FMSQ(0, 6, 1, 7, 10, mobile_celeron,
         "Intel Celeron Dual-Core Mobile T3000 (Penryn R0)"),
    FMSQ(0, 6, 1, 7, 10, mobile_pentium,
         "Intel Pentium Dual-Core Mobile T4000 (Penryn R0)"),
    FMSQ(0, 6, 1, 7, 10, desktop_celeron,
         "Intel Celeron E3000 (Wolfdale R0)"),
    FMSQ(0, 6, 1, 7, 10, desktop_pentium,
         "Intel Pentium E2000 / E5000 / E6000 (Wolfdale R0)"),
    FMSQ(0, 6, 1, 7, 10, intel_extreme,
         "Intel Core 2 Extreme (Yorkfield E0)"),
    FMS(0, 6, 1, 7, 10, "Intel Core 2 Duo / Core 2 Quad"
                        " (Wolfdale/Yorkfield E0/R0)"),
    FMQ(0, 6, 1, 7, intel_xeon,
        "Intel Xeon (Wolfdale/Yorkfield/Harpertown)"),
    FMQ(0, 6, 1, 7, mobile_core, "Intel Core 2 Duo Mobile (Penryn)"),
    FM(0, 6, 1, 7, "Intel Core 2 Duo / Core 2 Quad (Wolfdale/Yorkfield)"),
    FMSQ(0, 6, 1, 10, 4, intel_xeon, "Intel Xeon 5500 (Gainestown C0)"),
    FMSQ(0, 6, 1, 10, 4, intel_extreme,
         "Intel Core i7-900 Extreme (Bloomfield C0)"),
    FMS(0, 6, 1, 10, 4, "Intel Core i7-900 (Bloomfield C0)"),
    FMSQ(0, 6, 1, 10, 5, intel_xeon,
         "Intel Xeon 3500 / 5500 (Bloomfield/Gainestown D0)"),
    FMSQ(0, 6, 1, 10, 5, intel_extreme,
         "Intel Core i7-900 Extreme (Bloomfield D0)"),
    FMS(0, 6, 1, 10, 5, "Intel Core i7-900 (Bloomfield D0)"),
    FMQ(0, 6, 1, 10, intel_xeon,
        "Intel Xeon 3500 / 5500 (Bloomfield/Gainestown)"),
    FM(0, 6, 1, 10, "Intel Core i7-900 (Bloomfield)"),
    FMSQ(0, 6, 1, 12, 2, mobile_atom,
         "Intel Atom Z500 (Silverthorne C0)"),
    FMSQ(0, 6, 1, 12, 2, desktop_atom,
         "Intel Atom N200 / N270 / 230 / 330 (Diamondville C0)"),
    FMS(0, 6, 1, 12, 2, "Intel Atom (Silverthorne/Diamondville C0)"),
    FMS(0, 6, 1, 12, 10, "Intel Atom D400 / D500 / N400 / N500"
                         " (Pineview A0)"),
    FM(0, 6, 1, 12, "Intel Atom (Silverthorne/Diamondville/Pineview)"),
    FMS(0, 6, 1, 13, 1, "Intel Xeon 7400 (Dunnington A1)"),
    FM(0, 6, 1, 13, "Intel Xeon 7400 (Dunnington)"),
    FMSQ(0, 6, 1, 14, 4, intel_xeon,
         "Intel Xeon C5500 / C3500 (Jasper Forest B0)"),
    FMSQ(0, 6, 1, 14, 5, intel_xeon, "Intel Xeon 3400 (Lynnfield B1)"),
    FMSQ(0, 6, 1, 14, 5, mobile_core,
         "Intel Core i7-700 / i7-800 / i7-900 Mobile (Clarksfield B1)"),
    FMS(0, 6, 1, 14, 5, "Intel Core i5-700 / i7-800 (Lynnfield B1)"),
    FMQ(0, 6, 1, 14, intel_xeon,
        "Intel Xeon 3400 / C5500 / C3500 (Lynnfield/Jasper Forest)"),
    FMQ(0, 6, 1, 14, mobile_core, "Intel Core i7 Mobile (Clarksfield)"),
    FM(0, 6, 1, 14, "Intel Core i5-700 / i7-800 (Lynnfield)"),
    FM(0, 6, 1, 15, "Intel Core (Auburndale/Havendale)"),
    FMSQ(0, 6, 2, 5, 2, intel_xeon, "Intel Xeon L3406 (Clarkdale C2)"),
    FMSQ(0, 6, 2, 5, 2, mobile_core,
         "Intel Core i3 / i5 / i7 Mobile (Arrandale C2)"),
    FMSQ(0, 6, 2, 5, 2, desktop_pentium,
         "Intel Pentium G6900 (Clarkdale C2)"),
    FMS(0, 6, 2, 5, 2, "Intel Core i3-500 / i5-600 (Clarkdale C2)"),
    FMSQ(0, 6, 2, 5, 5, mobile_core,
         "Intel Core i3 / i5 / i7 Mobile (Arrandale K0)"),
    FMSQ(0, 6, 2, 5, 5, mobile_celeron,
         "Intel Celeron Mobile P4000 / U3000 (Arrandale K0)"),
    FMSQ(0, 6, 2, 5, 5, mobile_pentium,
         "Intel Pentium P6000 / U5000 Mobile (Arrandale K0)"),
    FMSQ(0, 6, 2, 5, 5, desktop_celeron,
         "Intel Celeron G1000 (Clarkdale K0)"),
    FMSQ(0, 6, 2, 5, 5, desktop_pentium,
         "Intel Pentium G6900 (Clarkdale K0)"),
    FMS(0, 6, 2, 5, 5, "Intel Core i3-500 / i5-600 (Clarkdale K0)"),
    FMQ(0, 6, 2, 5, mobile_core, "Intel Core i3 / i5 / i7 Mobile"
                                 " (Arrandale)"),
    FM(0, 6, 2, 5, "Intel Core i3-500 / i5-600 (Clarkdale)"),
    FMS(0, 6, 2, 6, 1, "Intel Atom Z600 (Lincroft C0)"),
    FM(0, 6, 2, 6, "Intel Atom Z600 (Lincroft)"),
    FMS(0, 6, 2, 7, 1, "Intel Atom Z2000 (Penwell B0)"),
    FM(0, 6, 2, 7, "Intel Atom Z2000 (Penwell)"),
    FMSQ(0, 6, 2, 10, 7, intel_xeon,
         "Intel Xeon E3-1100 / E3-1200 (Sandy Bridge D2/J1/Q0)"),
    FMSQ(0, 6, 2, 10, 7, mobile_celeron,
         "Intel Celeron Mobile B800 (Sandy Bridge J1/Q0)"),
    FMSQ(0, 6, 2, 10, 7, desktop_celeron,
         "Intel Celeron G400 / G500 (Sandy Bridge J1/Q0)"),
    FMSQ(0, 6, 2, 10, 7, mobile_pentium,
         "Intel Pentium Mobile B900 (Sandy Bridge J1/Q0)"),
    FMSQ(0, 6, 2, 10, 7, desktop_pentium,
         "Intel Pentium G500 / G600 / G800 (Sandy Bridge J1/Q0)"),
    FMSQ(0, 6, 2, 10, 7, mobile_core,
         "Intel Core i3 / i5 / i7 Mobile 2000 (Sandy Bridge D2/J1/Q0)"),
    FMSQ(0, 6, 2, 10, 7, desktop_core,
         "Intel Core i3-2000 / i5-2000 / i7-2000 (Sandy Bridge D2/J1/Q0)"),
    FMS(0, 6, 2, 10, 7, "Intel Sandy Bridge (D2/J1/Q0)"),
    FMQ(0, 6, 2, 10, intel_xeon, "Intel Xeon E3-1200 (Sandy Bridge)"),
    FMQ(0, 6, 2, 10, mobile_core,
        "Intel Core i3 / i5 / i7 Mobile 2000 (Sandy Bridge)"),
    FM(0, 6, 2, 10, "Intel Core i3-2000 / i5-2000 / i7-2000 (Sandy Bridge)"),
    FMSQ(0, 6, 2, 12, 2, intel_xeon,
         "Intel Xeon 3600 / 5600 (Westmere-EP B1)"),
    FMSQ(0, 6, 2, 12, 2, intel_extreme,
         "Intel Core i7-900 Extreme (Gulftown B1)"),
    FMS(0, 6, 2, 12, 2, "Intel Core i7-900 (Gulftown B1)"),
    FMQ(0, 6, 2, 12, intel_xeon, "Intel Xeon 3600 / 5600 (Westmere-EP)"),
    FM(0, 6, 2, 12, "Intel Core i7-900 (Gulftown)"),
    FMSQ(0, 6, 2, 13, 6, intel_xeon,
         "Intel Xeon E5-1600 / E5-2600 (Sandy Bridge-EP C1/M0)"),
    FMS(0, 6, 2, 13, 6, "Intel Core i7-3800 / i7-3900 (Sandy Bridge-E C1)"),
    FMSQ(0, 6, 2, 13, 7, intel_xeon,
         "Intel Xeon E5-1600 / E5-2400 / E5-2600 / E5-4600"
         " (Sandy Bridge-EP C2/M1)"),
    FMSQ(0, 6, 2, 13, 7, intel_extreme,
         "Intel Core i7-3900 Extreme (Sandy Bridge-E C2)"),
    FMS(0, 6, 2, 13, 7, "Intel Core i7-3800 / i7-3900 (Sandy Bridge-E C2)"),
    FMQ(0, 6, 2, 13, intel_xeon, "Intel Xeon E5 (Sandy Bridge-EP)"),
    FM(0, 6, 2, 13, "Intel Core i7-3800 / i7-3900 (Sandy Bridge-E)"),
    FMS(0, 6, 2, 14, 6, "Intel Xeon 6500 / 7500 (Beckton D0)"),
    FM(0, 6, 2, 14, "Intel Xeon 6500 / 7500 (Beckton)"),
    FMS(0, 6, 2, 15, 2, "Intel Xeon E7-8800 / E7-4800 / E7-2800"
                        " (Westmere-EX A2)"),
    FM(0, 6, 2, 15, "Intel Xeon E7 (Westmere-EX)"),
    FMS(0, 6, 3, 5, 1, "Intel Atom Z2760 (Cloverview C0)"),
    FM(0, 6, 3, 5, "Intel Atom Z2760 (Cloverview)"),
    FMS(0, 6, 3, 6, 1, "Intel Atom D2000 / N2000 (Cedarview B1/B2/B3)"),
    FM(0, 6, 3, 6, "Intel Atom D2000 / N2000 (Cedarview)"),
    FMSQ(0, 6, 3, 7, 3, desktop_celeron,
         "Intel Celeron J1800 / J1900 (Bay Trail-D B2/B3)"),
    FMSQ(0, 6, 3, 7, 3, mobile_celeron,
         "Intel Celeron N2800 / N2900 (Bay Trail-M B2/B3)"),
    FMSQ(0, 6, 3, 7, 3, desktop_pentium,
         "Intel Pentium J2800 / J2900 (Bay Trail-D B2/B3)"),
    FMSQ(0, 6, 3, 7, 3, mobile_pentium,
         "Intel Pentium N3500 (Bay Trail-M B2/B3)"),
    FMS(0, 6, 3, 7, 3, "Intel Atom Z3000 / E3800 (Bay Trail-T/I B2/B3)"),
    FMSQ(0, 6, 3, 7, 8, desktop_celeron,
         "Intel Celeron J1800 / J1900 (Bay Trail-D D0)"),
    FMSQ(0, 6, 3, 7, 8, mobile_celeron,
         "Intel Celeron N2800 / N2900 (Bay Trail-M D0)"),
    FMSQ(0, 6, 3, 7, 8, desktop_pentium,
         "Intel Pentium J2800 / J2900 (Bay Trail-D D0)"),
    FMSQ(0, 6, 3, 7, 8, mobile_pentium,
         "Intel Pentium N3500 (Bay Trail-M D0)"),
    FMS(0, 6, 3, 7, 8, "Intel Atom Z3000 / E3800 (Bay Trail-T/I D0)"),
    FMQ(0, 6, 3, 7, desktop_celeron, "Intel Celeron J1800 (Bay Trail-D)"),
    FMQ(0, 6, 3, 7, mobile_celeron, "Intel Celeron N2800 (Bay Trail-M)"),
    FM(0, 6, 3, 7, "Intel Atom Z3000 / E3800 (Bay Trail)"),
    FMSQ(0, 6, 3, 10, 9, intel_xeon,
         "Intel Xeon E3-1200 v2 (Ivy Bridge E1/N0/L1)"),
    FMSQ(0, 6, 3, 10, 9, mobile_celeron,
         "Intel Celeron 1000 Mobile (Ivy Bridge E1/N0/L1)"),
    FMSQ(0, 6, 3, 10, 9, desktop_celeron,
         "Intel Celeron G1600 (Ivy Bridge E1/N0/L1)"),
    FMSQ(0, 6, 3, 10, 9, mobile_pentium,
         "Intel Pentium 2000 Mobile (Ivy Bridge E1/N0/L1)"),
    FMSQ(0, 6, 3, 10, 9, desktop_pentium,
         "Intel Pentium G2000 (Ivy Bridge E1/N0/L1)"),
    FMSQ(0, 6, 3, 10, 9, mobile_core,
         "Intel Core i3 / i5 / i7 Mobile 3000 (Ivy Bridge E1/N0/L1)"),
    FMSQ(0, 6, 3, 10, 9, desktop_core,
         "Intel Core i3-3000 / i5-3000 / i7-3000 (Ivy Bridge E1/N0/L1)"),
    FMS(0, 6, 3, 10, 9, "Intel Ivy Bridge (E1/N0/L1)"),
    FMQ(0, 6, 3, 10, intel_xeon, "Intel Xeon E3-1200 v2 (Ivy Bridge)"),
    FMQ(0, 6, 3, 10, mobile_core,
        "Intel Core i3 / i5 / i7 Mobile 3000 (Ivy Bridge)"),
    FMQ(0, 6, 3, 10, desktop_core,
        "Intel Core i3-3000 / i5-3000 / i7-3000 (Ivy Bridge)"),
    FM(0, 6, 3, 10, "Intel Ivy Bridge"),
    FMSQ(0, 6, 3, 12, 3, intel_xeon, "Intel Xeon E3-1200 v3 (Haswell C0)"),
    FMSQ(0, 6, 3, 12, 3, mobile_celeron,
         "Intel Celeron 2900 Mobile (Haswell C0)"),
    FMSQ(0, 6, 3, 12, 3, desktop_celeron,
         "Intel Celeron G1800 (Haswell C0)"),
    FMSQ(0, 6, 3, 12, 3, mobile_pentium,
         "Intel Pentium 3500 Mobile (Haswell C0)"),
    FMSQ(0, 6, 3, 12, 3, desktop_pentium,
         "Intel Pentium G3000 (Haswell C0)"),
    FMSQ(0, 6, 3, 12, 3, mobile_core,
         "Intel Core i3 / i5 / i7 Mobile 4000 (Haswell C0)"),
    FMSQ(0, 6, 3, 12, 3, desktop_core,
         "Intel Core i3-4000 / i5-4000 / i7-4000 (Haswell C0)"),
    FMS(0, 6, 3, 12, 3, "Intel Haswell (C0)"),
    FMQ(0, 6, 3, 12, intel_xeon, "Intel Xeon E3-1200 v3 (Haswell)"),
    FMQ(0, 6, 3, 12, mobile_core,
        "Intel Core i3 / i5 / i7 Mobile 4000 (Haswell)"),
    FM(0, 6, 3, 12, "Intel Core i3-4000 / i5-4000 / i7-4000 (Haswell)"),
    FMSQ(0, 6, 3, 13, 4, mobile_celeron,
         "Intel Celeron 3000 (Broadwell-U E0/F0)"),
    FMSQ(0, 6, 3, 13, 4, mobile_pentium,
         "Intel Pentium 3800 (Broadwell-U E0/F0)"),
    FMSQ(0, 6, 3, 13, 4, intel_y_line,
         "Intel Core M-5Y00 (Broadwell-Y E0/F0)"),
    FMS(0, 6, 3, 13, 4, "Intel Core i3 / i5 / i7 5000U (Broadwell-U E0/F0)"),
    FM(0, 6, 3, 13, "Intel Core 5000 (Broadwell-U/Y)"),
    FMSQ(0, 6, 3, 14, 4, intel_xeon_mp,
         "Intel Xeon E7-8800 / E7-4800 / E7-2800 v2 (Ivy Bridge-EX D1)"),
    FMSQ(0, 6, 3, 14, 4, intel_xeon,
         "Intel Xeon E5-1600 / E5-2600 / E5-4600 v2"
         " (Ivy Bridge-EP C1/M1/S1)"),
    FMS(0, 6, 3, 14, 4, "Intel Core i7-4800 / i7-4900 (Ivy Bridge-E S1)"),
    FMSQ(0, 6, 3, 14, 7, intel_xeon,
         "Intel Xeon E7-8800 / E7-4800 / E7-2800 v2 (Ivy Bridge-EX D1)"),
    FMQ(0, 6, 3, 14, intel_xeon, "Intel Xeon E5 / E7 v2 (Ivy Bridge-EP/EX)"),
    FM(0, 6, 3, 14, "Intel Core i7-4800 / i7-4900 (Ivy Bridge-E)"),
    FMSQ(0, 6, 3, 15, 2, intel_xeon,
         "Intel Xeon E5-1600 / E5-2600 / E5-4600 v3 (Haswell-EP R2/M1)"),
    FMS(0, 6, 3, 15, 2, "Intel Core i7-5800 / i7-5900 (Haswell-E R2)"),
    FMSQ(0, 6, 3, 15, 4, intel_xeon,
         "Intel Xeon E7-8800 / E7-4800 v3 (Haswell-EX E0)"),
    FMQ(0, 6, 3, 15, intel_xeon, "Intel Xeon E5 / E7 v3 (Haswell-EP/EX)"),
    FM(0, 6, 3, 15, "Intel Core i7-5800 / i7-5900 (Haswell-E)"),
    FMSQ(0, 6, 4, 5, 1, mobile_celeron,
         "Intel Celeron 2900U (Haswell-ULT C0/D0)"),
    FMSQ(0, 6, 4, 5, 1, mobile_pentium,
         "Intel Pentium 3500U / 3700U (Haswell-ULT C0/D0)"),
    FMSQ(0, 6, 4, 5, 1, intel_y_line,
         "Intel Core i5 / i7 4000Y (Haswell-ULX C0/D0)"),
    FMS(0, 6, 4, 5, 1, "Intel Core i3 / i5 / i7 4000U (Haswell-ULT C0/D0)"),
    FM(0, 6, 4, 5, "Intel Core 4000U (Haswell-ULT)"),
    FMS(0, 6, 4, 6, 1, "Intel Core i7-4000 Mobile (Crystal Well C0)"),
    FM(0, 6, 4, 6, "Intel Core i7-4000 Mobile (Crystal Well)"),
    FMSQ(0, 6, 4, 7, 1, intel_xeon, "Intel Xeon E3-1200 v4 (Broadwell-H G0)"),
    FMSQ(0, 6, 4, 7, 1, mobile_core,
         "Intel Core i5 / i7 Mobile 5000 (Broadwell-H G0)"),
    FMS(0, 6, 4, 7, 1, "Intel Core i5-5000 / i7-5000 (Broadwell-H G0)"),
    FM(0, 6, 4, 7, "Intel Core 5000 (Broadwell-H)"),
    FMS(0, 6, 4, 10, 8, "Intel Atom Z3400 (Merrifield C0)"),
    FM(0, 6, 4, 10, "Intel Atom Z3400 (Merrifield)"),
    FMSQ(0, 6, 4, 12, 3, mobile_atom,
         "Intel Atom x5-Z8000 / x7-Z8000 (Cherry Trail C0)"),
    FMSQ(0, 6, 4, 12, 3, desktop_atom,
         "Intel Atom x5-E8000 (Braswell C0)"),
    FMSQ(0, 6, 4, 12, 3, intel_xeon, "Intel Atom x5-Z8000 (Cherry Trail C0)"),
    FMSQ(0, 6, 4, 12, 3, desktop_celeron,
         "Intel Celeron J3000 (Braswell C0)"),
    FMSQ(0, 6, 4, 12, 3, mobile_celeron,
         "Intel Celeron N3000 (Braswell C0)"),
    FMSQ(0, 6, 4, 12, 3, desktop_pentium,
         "Intel Pentium J3700 (Braswell C0)"),
    FMSQ(0, 6, 4, 12, 3, mobile_pentium,
         "Intel Pentium N3700 (Braswell C0)"),
    FMS(0, 6, 4, 12, 3, "Intel Cherry Trail / Braswell (C0)"),
    FMSQ(0, 6, 4, 12, 4, mobile_atom,
         "Intel Atom x5-Z8000 / x7-Z8000 (Cherry Trail D0)"),
    FMSQ(0, 6, 4, 12, 4, mobile_celeron,
         "Intel Celeron N3000 (Braswell D0)"),
    FMSQ(0, 6, 4, 12, 4, desktop_celeron,
         "Intel Celeron J3000 (Braswell D0)"),
    FMSQ(0, 6, 4, 12, 4, mobile_pentium,
         "Intel Pentium N3700 (Braswell D0)"),
    FMSQ(0, 6, 4, 12, 4, desktop_pentium,
         "Intel Pentium J3700 (Braswell D0)"),
    FMS(0, 6, 4, 12, 4, "Intel Cherry Trail / Braswell (D0)"),
    FM(0, 6, 4, 12, "Intel Cherry Trail / Braswell"),
    FMS(0, 6, 4, 13, 8, "Intel Atom C2000 (Avoton/Rangeley B0/C0)"),
    FM(0, 6, 4, 13, "Intel Atom C2000 (Avoton/Rangeley)"),
    FMSQ(0, 6, 4, 14, 3, intel_xeon,
         "Intel Xeon E3-1500m v5 Mobile (Skylake-H D1)"),
    FMSQ(0, 6, 4, 14, 3, mobile_celeron,
         "Intel Celeron 3800U / 3900U (Skylake-U D1)"),
    FMSQ(0, 6, 4, 14, 3, mobile_pentium,
         "Intel Pentium 4400U / 4405U (Skylake-U D1)"),
    FMSQ(0, 6, 4, 14, 3, intel_y_line,
         "Intel Core m3-6Y00 / m5-6Y00 / m7-6Y00 (Skylake-Y D1)"),
    FMS(0, 6, 4, 14, 3, "Intel Core i3 / i5 / i7 6000U (Skylake-U D1)"),
    FMQ(0, 6, 4, 14, intel_y_line, "Intel Core m3 / m5 / m7 (Skylake-Y)"),
    FM(0, 6, 4, 14, "Intel Core 6000U (Skylake-U)"),
    FMSQ(0, 6, 4, 15, 1, intel_xeon_mp,
         "Intel Xeon E7-8800 / E7-4800 v4 (Broadwell-EX B0)"),
    FMSQ(0, 6, 4, 15, 1, intel_xeon,
         "Intel Xeon E5-1600 / E5-2600 / E5-4600 v4 (Broadwell-EP B0/M0/R0)"),
    FMS(0, 6, 4, 15, 1, "Intel Core i7-6800K / i7-6900K / i7-6950X"
                        " (Broadwell-E R0)"),
    FMQ(0, 6, 4, 15, intel_xeon, "Intel Xeon E5 / E7 v4 (Broadwell-EP/EX)"),
    FM(0, 6, 4, 15, "Intel Core i7-6800K / i7-6900K (Broadwell-E)"),
    FMSQ(0, 6, 5, 5, 4, intel_scalable,
         "Intel Xeon Scalable (1st Gen) (Skylake-SP H0/M0/U0)"),
    FMSQ(0, 6, 5, 5, 4, intel_xeon,
         "Intel Xeon W-2100 / D-2100 (Skylake-W/DE H0/M0/U0)"),
    FMS(0, 6, 5, 5, 4, "Intel Core i7-7800X / i9-7900X (Skylake-X H0/M0/U0)"),
    FMSQ(0, 6, 5, 5, 6, intel_scalable,
         "Intel Xeon Scalable (2nd Gen) (Cascade Lake B0)"),
    FMSQ(0, 6, 5, 5, 6, intel_xeon, "Intel Xeon W-2200 (Cascade Lake-W B0)"),
    FMS(0, 6, 5, 5, 6, "Intel Core i9-10900X (Cascade Lake-X B0)"),
    FMSQ(0, 6, 5, 5, 7, intel_scalable,
         "Intel Xeon Scalable (2nd Gen) (Cascade Lake B1/L1/R1)"),
    FMSQ(0, 6, 5, 5, 7, intel_xeon,
         "Intel Xeon W-2200 / W-3200 (Cascade Lake-W B1/L1/R1)"),
    FMS(0, 6, 5, 5, 7, "Intel Core i9-10900X (Cascade Lake-X B1/L1/R1)"),
    FMS(0, 6, 5, 5, 10, "Intel Xeon Scalable (3rd Gen) (Cooper Lake A0)"),
    FMS(0, 6, 5, 5, 11, "Intel Xeon Scalable (3rd Gen) (Cooper Lake A1)"),
    FMQ(0, 6, 5, 5, intel_xeon,
        "Intel Xeon Scalable (Skylake-SP/Cascade Lake/Cooper Lake)"),
    FM(0, 6, 5, 5, "Intel Core i7 / i9 (Skylake-X/Cascade Lake-X)"),
    FMSQ(0, 6, 5, 6, 2, intel_xeon, "Intel Xeon D-1500 (Broadwell-DE V1)"),
    FMSQ(0, 6, 5, 6, 3, intel_xeon, "Intel Xeon D-1500 (Broadwell-DE V2/V3)"),
    FMSQ(0, 6, 5, 6, 4, intel_xeon,
         "Intel Xeon D-1500 / D-1600 (Broadwell-DE Y0)"),
    FMSQ(0, 6, 5, 6, 5, intel_xeon,
         "Intel Xeon D-1500N / D-1600N (Broadwell-DE A1)"),
    FMQ(0, 6, 5, 6, desktop_pentium, "Intel Pentium D1500 (Broadwell-DE)"),
    FM(0, 6, 5, 6, "Intel Xeon D-1500 (Broadwell-DE)"),
    FMS(0, 6, 5, 7, 1, "Intel Xeon Phi x200 (Knights Landing B0)"),
    FM(0, 6, 5, 7, "Intel Xeon Phi x200 (Knights Landing)"),
    FMS(0, 6, 5, 10, 0, "Intel Atom Z3500 (Moorefield B0)"),
    FM(0, 6, 5, 10, "Intel Atom Z3500 (Moorefield)"),
    FMSQ(0, 6, 5, 12, 9, desktop_celeron,
         "Intel Celeron J3000 (Apollo Lake B0/B1/D0)"),
    FMSQ(0, 6, 5, 12, 9, mobile_celeron,
         "Intel Celeron N3000 (Apollo Lake B0/B1/D0)"),
    FMSQ(0, 6, 5, 12, 9, desktop_pentium,
         "Intel Pentium J4000 (Apollo Lake B0/B1/D0)"),
    FMSQ(0, 6, 5, 12, 9, mobile_pentium,
         "Intel Pentium N4000 (Apollo Lake B0/B1/D0)"),
    FMS(0, 6, 5, 12, 9, "Intel Atom x5-E3900 / x7-E3900"
                        " (Apollo Lake B0/B1/D0)"),
    FMSQ(0, 6, 5, 12, 10, desktop_celeron,
         "Intel Celeron J3000 (Apollo Lake E0)"),
    FMSQ(0, 6, 5, 12, 10, mobile_celeron,
         "Intel Celeron N3000 (Apollo Lake E0)"),
    FMS(0, 6, 5, 12, 10, "Intel Atom x5-E3900 / x7-E3900 (Apollo Lake E0)"),
    FM(0, 6, 5, 12, "Intel Atom / Celeron / Pentium (Apollo Lake)"),
    FM(0, 6, 5, 13, "Intel x3-C3000 (SoFIA)"),
    FMSQ(0, 6, 5, 14, 3, intel_xeon,
         "Intel Xeon E3-1200 v5 / E3-1500 v5 (Skylake-S/H R0/N0/S0)"),
    FMSQ(0, 6, 5, 14, 3, mobile_core,
         "Intel Core i3 / i5 / i7 6000H Mobile (Skylake-H R0/N0)"),
    FMSQ(0, 6, 5, 14, 3, desktop_celeron,
         "Intel Celeron G3900 (Skylake-S S0)"),
    FMSQ(0, 6, 5, 14, 3, desktop_pentium,
         "Intel Pentium G4000 (Skylake-S R0/S0)"),
    FMS(0, 6, 5, 14, 3, "Intel Core i3-6000 / i5-6000 / i7-6000"
                        " (Skylake-S R0/N0/S0)"),
    FMQ(0, 6, 5, 14, intel_xeon, "Intel Xeon E3 v5 (Skylake)"),
    FM(0, 6, 5, 14, "Intel Core i3-6000 / i5-6000 / i7-6000 (Skylake)"),
    FMS(0, 6, 5, 15, 1, "Intel Atom C3000 (Denverton B0/B1)"),
    FM(0, 6, 5, 15, "Intel Atom C3000 (Denverton)"),
    FMS(0, 6, 6, 6, 3, "Intel Core i3-8121U / m3-8114Y (Cannon Lake D0)"),
    FM(0, 6, 6, 6, "Intel Core i3-8121U (Cannon Lake)"),
    FMSQ(0, 6, 6, 10, 4, intel_xeon,
         "Intel Xeon Scalable (3rd Gen) (Ice Lake-SP B0)"),
    FMSQ(0, 6, 6, 10, 5, intel_xeon,
         "Intel Xeon Scalable (3rd Gen) / W-3300 (Ice Lake-SP C0)"),
    FMSQ(0, 6, 6, 10, 6, intel_xeon,
         "Intel Xeon Scalable (3rd Gen) / W-3300 (Ice Lake-SP D0)"),
    FM(0, 6, 6, 10, "Intel Xeon Scalable (3rd Gen) (Ice Lake-SP)"),
    FMS(0, 6, 6, 12, 1, "Intel Xeon D-1700 / D-2700 (Ice Lake-D B0)"),
    FM(0, 6, 6, 12, "Intel Xeon D-1700 / D-2700 (Ice Lake-D)"),
    FM(0, 6, 6, 14, "Intel Puma 7 (Cougar Mountain)"),
    FM(0, 6, 7, 5, "Intel Spreadtrum SC9853I-IA (Airmont)"),
    FMSQ(0, 6, 7, 10, 1, desktop_celeron,
         "Intel Celeron J4000 (Gemini Lake B0)"),
    FMSQ(0, 6, 7, 10, 1, mobile_celeron,
         "Intel Celeron N4000 (Gemini Lake B0)"),
    FMSQ(0, 6, 7, 10, 1, desktop_pentium,
         "Intel Pentium Silver J5000 (Gemini Lake B0)"),
    FMSQ(0, 6, 7, 10, 1, mobile_pentium,
         "Intel Pentium Silver N5000 (Gemini Lake B0)"),
    FMS(0, 6, 7, 10, 1, "Intel Pentium Silver / Celeron (Gemini Lake B0)"),
    FMSQ(0, 6, 7, 10, 8, desktop_celeron,
         "Intel Celeron J4005 / J4105 (Gemini Lake Refresh R0)"),
    FMSQ(0, 6, 7, 10, 8, mobile_celeron,
         "Intel Celeron N4020 / N4120 (Gemini Lake Refresh R0)"),
    FMS(0, 6, 7, 10, 8, "Intel Pentium Silver J5040 / N5030"
                        " (Gemini Lake Refresh R0)"),
    FM(0, 6, 7, 10, "Intel Pentium Silver / Celeron (Gemini Lake)"),
    FMS(0, 6, 7, 13, 5, "Intel Core i3 / i5 / i7-1000G (Ice Lake B0)"),
    FM(0, 6, 7, 13, "Intel Core (Ice Lake)"),
    FMSQ(0, 6, 7, 14, 5, intel_y_line,
         "Intel Core i3 / i5 / i7-1000G Y (Ice Lake-Y D1)"),
    FMSQ(0, 6, 7, 14, 5, mobile_pentium,
         "Intel Pentium 6805 (Ice Lake-U D1)"),
    FMS(0, 6, 7, 14, 5, "Intel Core i3 / i5 / i7-1000G (Ice Lake-U D1)"),
    FM(0, 6, 7, 14, "Intel Core (Ice Lake-U/Y)"),
    FMS(0, 6, 8, 5, 0, "Intel Xeon Phi 72x5 (Knights Mill A0)"),
    FM(0, 6, 8, 5, "Intel Xeon Phi 72x5 (Knights Mill)"),
    FMS(0, 6, 8, 6, 4, "Intel Atom P5900 / C5000"
                       " (Snow Ridge/Jacobsville B0)"),
    FMS(0, 6, 8, 6, 5, "Intel Atom P5900 / C5000"
                       " (Snow Ridge/Jacobsville B1)"),
    FM(0, 6, 8, 6, "Intel Atom P5900 / C5000 (Snow Ridge/Jacobsville)"),
    FMS(0, 6, 8, 10, 1, "Intel Core i3 / i5 (Lakefield B2/B3)"),
    FM(0, 6, 8, 10, "Intel Core i3 / i5 (Lakefield)"),
    FMSQ(0, 6, 8, 12, 1, mobile_celeron,
         "Intel Celeron 6000 (Tiger Lake-U B1)"),
    FMSQ(0, 6, 8, 12, 1, mobile_pentium,
         "Intel Pentium Gold 7505 (Tiger Lake-U B1)"),
    FMS(0, 6, 8, 12, 1, "Intel Core i3 / i5 / i7 11th Gen"
                        " (Tiger Lake-UP3/UP4 B1)"),
    FMSQ(0, 6, 8, 12, 2, mobile_celeron,
         "Intel Celeron 6000 (Tiger Lake-U C0)"),
    FMSQ(0, 6, 8, 12, 2, mobile_pentium,
         "Intel Pentium Gold 7505 (Tiger Lake-U C0)"),
    FMS(0, 6, 8, 12, 2, "Intel Core i3 / i5 / i7 11th Gen"
                        " (Tiger Lake-UP3/UP4 C0)"),
    FM(0, 6, 8, 12, "Intel Core 11th Gen (Tiger Lake-U)"),
    FMSQ(0, 6, 8, 13, 1, intel_xeon,
         "Intel Xeon W-11000M (Tiger Lake-H R0)"),
    FMS(0, 6, 8, 13, 1, "Intel Core i5 / i7 / i9 11th Gen (Tiger Lake-H R0)"),
    FM(0, 6, 8, 13, "Intel Core 11th Gen (Tiger Lake-H)"),
    FMSQ(0, 6, 8, 14, 9, intel_i_8000,
         "Intel Core i5 / i7-8000Y / m3-8100Y (Amber Lake-Y H0)"),
    FMSQ(0, 6, 8, 14, 9, intel_y_line,
         "Intel Core m3 / i5 / i7 7Y00 (Kaby Lake-Y H0)"),
    FMSQ(0, 6, 8, 14, 9, mobile_celeron,
         "Intel Celeron 3865U / 3965U (Kaby Lake-U H0)"),
    FMSQ(0, 6, 8, 14, 9, mobile_pentium,
         "Intel Pentium 4415U (Kaby Lake-U H0)"),
    FMS(0, 6, 8, 14, 9, "Intel Core i3 / i5 / i7 7000U (Kaby Lake-U H0)"),
    FMSQ(0, 6, 8, 14, 10, mobile_celeron,
         "Intel Celeron 3867U (Kaby Lake-R Y0)"),
    FMS(0, 6, 8, 14, 10, "Intel Core i5 / i7 8000U (Kaby Lake-R Y0)"),
    FMSQ(0, 6, 8, 14, 11, mobile_celeron,
         "Intel Celeron 4205U (Whiskey Lake-U W0)"),
    FMSQ(0, 6, 8, 14, 11, mobile_pentium,
         "Intel Pentium Gold 5405U (Whiskey Lake-U W0)"),
    FMS(0, 6, 8, 14, 11, "Intel Core i3 / i5 / i7 8000U"
                         " (Whiskey Lake-U W0)"),
    FMSQ(0, 6, 8, 14, 12, intel_i_10000,
         "Intel Core i3 / i5 / i7 10000U (Comet Lake-U V1)"),
    FMSQ(0, 6, 8, 14, 12, intel_y_line,
         "Intel Core i5 / i7-10000Y (Amber Lake-Y V0)"),
    FMSQ(0, 6, 8, 14, 12, intel_i_8000,
         "Intel Core i3 / i5 / i7 8000U (Whiskey Lake-U V0)"),
    FMSQ(0, 6, 8, 14, 12, mobile_celeron,
         "Intel Celeron 5205U (Comet Lake-U V1)"),
    FMSQ(0, 6, 8, 14, 12, mobile_pentium,
         "Intel Pentium Gold 6405U (Comet Lake-U V1)"),
    FMS(0, 6, 8, 14, 12, "Intel Core (Whiskey Lake-U/Comet Lake-U V0/V1)"),
    FM(0, 6, 8, 14, "Intel Core (Kaby Lake/Amber Lake/Whiskey Lake"
                    "/Comet Lake)"),
    FMSQ(0, 6, 8, 15, 4, intel_xeon,
         "Intel Xeon Scalable (4th Gen) (Sapphire Rapids-SP D0)"),
    FMSQ(0, 6, 8, 15, 5, intel_xeon,
         "Intel Xeon Scalable (4th Gen) (Sapphire Rapids-SP E0)"),
    FMSQ(0, 6, 8, 15, 6, intel_xeon,
         "Intel Xeon Scalable (4th Gen) (Sapphire Rapids-SP E3)"),
    FMSQ(0, 6, 8, 15, 7, intel_xeon,
         "Intel Xeon Scalable (4th Gen) (Sapphire Rapids-SP E4)"),
    FMSQ(0, 6, 8, 15, 8, intel_scalable,
         "Intel Xeon Scalable (4th Gen) (Sapphire Rapids-SP E5)"),
    FMSQ(0, 6, 8, 15, 8, intel_xeon,
         "Intel Xeon W-2400 / W-3400 (Sapphire Rapids-WS E5)"),
    FM(0, 6, 8, 15, "Intel Xeon Scalable (4th Gen) (Sapphire Rapids)"),
    FMSQ(0, 6, 9, 6, 1, mobile_celeron,
         "Intel Celeron J6000 / N6000 (Elkhart Lake B1)"),
    FMSQ(0, 6, 9, 6, 1, mobile_pentium,
         "Intel Pentium J6000 / N6000 (Elkhart Lake B1)"),
    FMS(0, 6, 9, 6, 1, "Intel Atom x6000E (Elkhart Lake B1)"),
    FM(0, 6, 9, 6, "Intel Atom x6000E (Elkhart Lake)"),
    FMSQ(0, 6, 9, 7, 2, desktop_celeron,
         "Intel Celeron G6900 (Alder Lake-S C0)"),
    FMSQ(0, 6, 9, 7, 2, desktop_pentium,
         "Intel Pentium Gold G7400 (Alder Lake-S C0)"),
    FMSQ(0, 6, 9, 7, 2, intel_xeon, "Intel Xeon E-2400 (Alder Lake-S C0)"),
    FMS(0, 6, 9, 7, 2, "Intel Core i5 / i7 / i9 12th Gen (Alder Lake-S C0)"),
    FMSQ(0, 6, 9, 7, 5, desktop_celeron,
         "Intel Celeron G6900 (Alder Lake-S H0)"),
    FMSQ(0, 6, 9, 7, 5, desktop_pentium,
         "Intel Pentium Gold G7400 (Alder Lake-S H0)"),
    FMS(0, 6, 9, 7, 5, "Intel Core i3 / i5 12th Gen (Alder Lake-S H0)"),
    FM(0, 6, 9, 7, "Intel Core 12th Gen (Alder Lake-S)"),
    FMSQ(0, 6, 9, 10, 3, mobile_celeron,
         "Intel Celeron 7300 (Alder Lake-P/U L0)"),
    FMSQ(0, 6, 9, 10, 3, mobile_pentium,
         "Intel Pentium Gold 8500 (Alder Lake-P/U L0)"),
    FMS(0, 6, 9, 10, 3, "Intel Core i3 / i5 / i7 12th Gen Mobile"
                        " (Alder Lake-P/H/U L0)"),
    FMSQ(0, 6, 9, 10, 4, intel_xeon,
         "Intel Xeon D-1800 / D-2800 (Alder Lake-P R0)"),
    FMS(0, 6, 9, 10, 4, "Intel Core i3 / i5 / i7 12th Gen Mobile"
                        " (Alder Lake-P/H/U R0)"),
    FM(0, 6, 9, 10, "Intel Core 12th Gen Mobile (Alder Lake-P/H/U)"),
    FMSQ(0, 6, 9, 12, 0, mobile_pentium,
         "Intel Pentium Silver N6000 (Jasper Lake A1)"),
    FMS(0, 6, 9, 12, 0, "Intel Celeron N4500 / N5100 (Jasper Lake A1)"),
    FM(0, 6, 9, 12, "Intel Pentium Silver / Celeron (Jasper Lake)"),
    FM(0, 6, 9, 13, "Intel NNP I-1000 (Spring Hill)"),
    FMSQ(0, 6, 9, 14, 9, intel_xeon,
         "Intel Xeon E3-1200 v6 / E3-1500 v6 (Kaby Lake B0)"),
    FMSQ(0, 6, 9, 14, 9, intel_g_line,
         "Intel Core i5 / i7-8000G (Kaby Lake-G B0)"),
    FMSQ(0, 6, 9, 14, 9, mobile_core,
         "Intel Core i3 / i5 / i7 7000H Mobile (Kaby Lake-H B0)"),
    FMSQ(0, 6, 9, 14, 9, desktop_celeron,
         "Intel Celeron G3900 (Kaby Lake-S B0)"),
    FMSQ(0, 6, 9, 14, 9, desktop_pentium,
         "Intel Pentium G4560 / G4600 (Kaby Lake-S B0)"),
    FMS(0, 6, 9, 14, 9, "Intel Core i3-7000 / i5-7000 / i7-7000"
                        " (Kaby Lake-S B0)"),
    FMSQ(0, 6, 9, 14, 10, intel_xeon,
         "Intel Xeon E-2100 (Coffee Lake U0)"),
    FMSQ(0, 6, 9, 14, 10, mobile_core,
         "Intel Core i5 / i7 / i9 8000H Mobile (Coffee Lake-H U0)"),
    FMSQ(0, 6, 9, 14, 10, desktop_celeron,
         "Intel Celeron G4900 (Coffee Lake-S U0)"),
    FMSQ(0, 6, 9, 14, 10, desktop_pentium,
         "Intel Pentium Gold G5000 (Coffee Lake-S U0)"),
    FMS(0, 6, 9, 14, 10, "Intel Core i3-8000 / i5-8000 / i7-8000"
                         " (Coffee Lake-S U0)"),
    FMSQ(0, 6, 9, 14, 11, intel_xeon,
         "Intel Xeon E-2100 (Coffee Lake B0)"),
    FMSQ(0, 6, 9, 14, 11, desktop_celeron,
         "Intel Celeron G4900 (Coffee Lake-S B0)"),
    FMSQ(0, 6, 9, 14, 11, desktop_pentium,
         "Intel Pentium Gold G5000 (Coffee Lake-S B0)"),
    FMS(0, 6, 9, 14, 11, "Intel Core i3-8000 / i3-9000 (Coffee Lake-S B0)"),
    FMSQ(0, 6, 9, 14, 12, intel_xeon,
         "Intel Xeon E-2200 (Coffee Lake Refresh P0)"),
    FMSQ(0, 6, 9, 14, 12, desktop_celeron,
         "Intel Celeron G4900 (Coffee Lake Refresh P0)"),
    FMSQ(0, 6, 9, 14, 12, desktop_pentium,
         "Intel Pentium Gold G5400 (Coffee Lake Refresh P0)"),
    FMS(0, 6, 9, 14, 12, "Intel Core i3 / i5 / i7 / i9 9000"
                         " (Coffee Lake Refresh P0)"),
    FMSQ(0, 6, 9, 14, 13, intel_cc150,
         "Intel CC150 (Coffee Lake Refresh R0)"),
    FMSQ(0, 6, 9, 14, 13, intel_xeon,
         "Intel Xeon E-2200 (Coffee Lake Refresh R0)"),
    FMSQ(0, 6, 9, 14, 13, mobile_core,
         "Intel Core i5 / i7 / i9 9000H Mobile (Coffee Lake Refresh R0)"),
    FMS(0, 6, 9, 14, 13, "Intel Core i5 / i7 / i9 9000"
                         " (Coffee Lake Refresh R0)"),
    FMQ(0, 6, 9, 14, intel_xeon, "Intel Xeon E3 v6 / E-2100 / E-2200"
                                 " (Kaby Lake/Coffee Lake)"),
    FM(0, 6, 9, 14, "Intel Core (Kaby Lake/Coffee Lake)"),
    FMSQ(0, 6, 10, 5, 2, intel_xeon, "Intel Xeon W-1200 (Comet Lake-S Q0)"),
    FMSQ(0, 6, 10, 5, 2, mobile_core,
         "Intel Core i5 / i7 / i9 10000H Mobile (Comet Lake-H R1)"),
    FMSQ(0, 6, 10, 5, 2, desktop_pentium,
         "Intel Pentium Gold G6400 (Comet Lake-S Q0)"),
    FMS(0, 6, 10, 5, 2, "Intel Core i5 / i7 / i9 10th Gen (Comet Lake-S Q0)"),
    FMSQ(0, 6, 10, 5, 3, desktop_celeron,
         "Intel Celeron G5900 (Comet Lake-S G1)"),
    FMSQ(0, 6, 10, 5, 3, desktop_pentium,
         "Intel Pentium Gold G6400 (Comet Lake-S G1)"),
    FMS(0, 6, 10, 5, 3, "Intel Core i3 / i5 10th Gen (Comet Lake-S G1)"),
    FMS(0, 6, 10, 5, 5, "Intel Core i3 / i5 10th Gen (Comet Lake-S Q0)"),
    FM(0, 6, 10, 5, "Intel Core 10th Gen (Comet Lake-S/H)"),
    FMSQ(0, 6, 10, 6, 0, mobile_celeron,
         "Intel Celeron 5205U (Comet Lake-U A0)"),
    FMS(0, 6, 10, 6, 0, "Intel Core i3 / i5 / i7 10000U (Comet Lake-U A0)"),
    FMS(0, 6, 10, 6, 1, "Intel Core i3 / i5 / i7 10000U (Comet Lake-U K1)"),
    FM(0, 6, 10, 6, "Intel Core 10000U (Comet Lake-U)"),
    FMSQ(0, 6, 10, 7, 1, intel_xeon,
         "Intel Xeon E-2300 / W-1300 (Rocket Lake B0)"),
    FMS(0, 6, 10, 7, 1, "Intel Core i5 / i7 / i9 11th Gen (Rocket Lake B0)"),
    FM(0, 6, 10, 7, "Intel Core 11th Gen (Rocket Lake)"),
    FMS(0, 6, 10, 10, 4, "Intel Core Ultra 5 / 7 / 9 Series 1"
                         " (Meteor Lake-H/U C0/C1)"),
    FM(0, 6, 10, 10, "Intel Core Ultra Series 1 (Meteor Lake)"),
    FM(0, 6, 10, 12, "Intel Core Ultra (Meteor Lake-S)"),
    FMSQ(0, 6, 10, 13, 1, intel_xeon,
         "Intel Xeon 6 P-core (Granite Rapids-AP/SP B0)"),
    FM(0, 6, 10, 13, "Intel Xeon 6 P-core (Granite Rapids)"),
    FM(0, 6, 10, 14, "Intel Xeon 6 SoC (Granite Rapids-D)"),
    FMS(0, 6, 10, 15, 3, "Intel Xeon 6 E-core (Sierra Forest C0)"),
    FM(0, 6, 10, 15, "Intel Xeon 6 E-core (Sierra Forest)"),
    FM(0, 6, 11, 5, "Intel Core Ultra Series 2 (Arrow Lake-U)"),
    FM(0, 6, 11, 6, "Intel Atom C6000 (Grand Ridge)"),
    FMSQ(0, 6, 11, 7, 1, intel_xeon, "Intel Xeon E-2400 (Raptor Lake-E B0)"),
    FMSQ(0, 6, 11, 7, 1, mobile_core,
         "Intel Core i5 / i7 / i9 14th Gen Mobile (Raptor Lake-HX B0)"),
    FMS(0, 6, 11, 7, 1, "Intel Core i5 / i7 / i9 13th / 14th Gen"
                        " (Raptor Lake-S B0)"),
    FM(0, 6, 11, 7, "Intel Core 13th / 14th Gen (Raptor Lake-S)"),
    FMSQ(0, 6, 11, 10, 2, mobile_celeron,
         "Intel Celeron 7305 (Raptor Lake-P/U J0)"),
    FMS(0, 6, 11, 10, 2, "Intel Core i3 / i5 / i7 13th Gen Mobile"
                         " (Raptor Lake-P/H/U J0)"),
    FMS(0, 6, 11, 10, 3, "Intel Core i3 / i5 / i7 13th Gen Mobile"
                         " (Raptor Lake-P/H/U Q0)"),
    FM(0, 6, 11, 10, "Intel Core 13th Gen Mobile (Raptor Lake-P/H/U)"),
    FMS(0, 6, 11, 13, 1, "Intel Core Ultra 5 / 7 / 9 Series 2"
                         " (Lunar Lake B0)"),
    FM(0, 6, 11, 13, "Intel Core Ultra Series 2 (Lunar Lake)"),
    FMSQ(0, 6, 11, 14, 0, mobile_core, "Intel Core i3-N300 (Alder Lake-N A0)"),
    FMS(0, 6, 11, 14, 0, "Intel Processor N50 / N97 / N100 / N200"
                         " (Alder Lake-N A0)"),
    FM(0, 6, 11, 14, "Intel Processor N (Alder Lake-N/Twin Lake)"),
    FMS(0, 6, 11, 15, 2, "Intel Core i5 / i7 / i9 13th / 14th Gen"
                         " (Raptor Lake-S C0)"),
    FMS(0, 6, 11, 15, 5, "Intel Core i3 / i5 12th / 13th Gen"
                         " (Alder Lake-S / Raptor Lake-S H0)"),
    FM(0, 6, 11, 15, "Intel Core 13th / 14th Gen (Raptor Lake-S)"),
    FM(0, 6, 12, 5, "Intel Core Ultra Series 2 (Arrow Lake-H)"),
    FMS(0, 6, 12, 6, 2, "Intel Core Ultra 5 / 7 / 9 200S (Arrow Lake-S B0)"),
    FM(0, 6, 12, 6, "Intel Core Ultra Series 2 (Arrow Lake-S)"),
    FM(0, 6, 12, 12, "Intel Core Ultra Series 3 (Panther Lake)"),
    FMS(0, 6, 12, 15, 2, "Intel Xeon Scalable (5th Gen)"
                         " (Emerald Rapids A1)"),
    FM(0, 6, 12, 15, "Intel Xeon Scalable (5th Gen) (Emerald Rapids)"),
    FM(0, 6, 13, 13, "Intel Xeon 6+ E-core (Clearwater Forest)"),
    F(0, 6, "Intel Pentium II / Pentium III / Pentium M / Celeron"
            " / Celeron M / Core / Core 2 / Core i / Xeon / Atom"
            " (unknown model)"),

    # Family 7: Itanium
    FM(0, 7, 0, 0, "Intel Itanium (Merced)"),
    F(0, 7, "Intel Itanium (unknown model)"),

    # Family 0xb: Xeon Phi coprocessors
    FM(0, 11, 0, 0, "Intel Xeon Phi (Knights Ferry)"),
    FMS(0, 11, 0, 1, 1, "Intel Xeon Phi x100 (Knights Corner B0)"),
    FMS(0, 11, 0, 1, 3, "Intel Xeon Phi x100 (Knights Corner B1)"),
    FMS(0, 11, 0, 1, 4, "Intel Xeon Phi x100 (Knights Corner C0)"),
    FM(0, 11, 0, 1, "Intel Xeon Phi x100 (Knights Corner)"),
    F(0, 11, "Intel Xeon Phi (unknown model)"),

    # Family 0xf: NetBurst
    FMSQ(0, 15, 0, 0, 7, intel_xeon, "Intel Xeon (Foster B2)"),
    FMS(0, 15, 0, 0, 7, "Intel Pentium 4 (Willamette B2)"),
    FMSQ(0, 15, 0, 0, 10, intel_xeon, "Intel Xeon (Foster C1)"),
    FMS(0, 15, 0, 0, 10, "Intel Pentium 4 (Willamette C1)"),
    FMQ(0, 15, 0, 0, intel_xeon, "Intel Xeon (Foster)"),
    FM(0, 15, 0, 0, "Intel Pentium 4 (Willamette)"),
    FMSQ(0, 15, 0, 1, 1, intel_xeon_mp, "Intel Xeon MP (Foster C0)"),
    FMSQ(0, 15, 0, 1, 1, intel_xeon, "Intel Xeon (Foster C0)"),
    FMSQ(0, 15, 0, 1, 1, desktop_celeron, "Intel Celeron (Willamette C0)"),
    FMS(0, 15, 0, 1, 1, "Intel Pentium 4 (Willamette C0)"),
    FMSQ(0, 15, 0, 1, 2, intel_xeon_mp, "Intel Xeon MP (Foster D0)"),
    FMSQ(0, 15, 0, 1, 2, intel_xeon, "Intel Xeon (Foster D0)"),
    FMSQ(0, 15, 0, 1, 2, desktop_celeron, "Intel Celeron (Willamette D0)"),
    FMS(0, 15, 0, 1, 2, "Intel Pentium 4 (Willamette D0)"),
    FMSQ(0, 15, 0, 1, 3, intel_xeon, "Intel Xeon (Foster E0)"),
    FMSQ(0, 15, 0, 1, 3, desktop_celeron, "Intel Celeron (Willamette E0)"),
    FMS(0, 15, 0, 1, 3, "Intel Pentium 4 (Willamette E0)"),
    FMQ(0, 15, 0, 1, intel_xeon_mp, "Intel Xeon MP (Foster)"),
    FMQ(0, 15, 0, 1, intel_xeon, "Intel Xeon (Foster)"),
    FMQ(0, 15, 0, 1, desktop_celeron, "Intel Celeron (Willamette)"),
    FM(0, 15, 0, 1, "Intel Pentium 4 (Willamette)"),
    FMSQ(0, 15, 0, 2, 4, netburst_xeon_l3, "Intel Xeon MP (Gallatin B0)"),
    FMSQ(0, 15, 0, 2, 4, intel_xeon, "Intel Xeon (Prestonia B0)"),
    FMSQ(0, 15, 0, 2, 4, mobile_pentium,
         "Intel Mobile Pentium 4-M (Northwood B0)"),
    FMSQ(0, 15, 0, 2, 4, desktop_celeron, "Intel Celeron (Northwood B0)"),
    FMS(0, 15, 0, 2, 4, "Intel Pentium 4 (Northwood B0)"),
    FMSQ(0, 15, 0, 2, 5, netburst_xeon_l3, "Intel Xeon MP (Gallatin M0)"),
    FMSQ(0, 15, 0, 2, 5, intel_extreme,
         "Intel Pentium 4 Extreme Edition (Gallatin M0)"),
    FMS(0, 15, 0, 2, 5, "Intel Xeon MP (Gallatin M0)"),
    FMSQ(0, 15, 0, 2, 7, intel_xeon, "Intel Xeon (Prestonia C1)"),
    FMSQ(0, 15, 0, 2, 7, mobile_celeron,
         "Intel Mobile Celeron (Northwood C1)"),
    FMSQ(0, 15, 0, 2, 7, mobile_pentium,
         "Intel Mobile Pentium 4-M (Northwood C1)"),
    FMSQ(0, 15, 0, 2, 7, desktop_celeron, "Intel Celeron (Northwood C1)"),
    FMS(0, 15, 0, 2, 7, "Intel Pentium 4 (Northwood C1)"),
    FMSQ(0, 15, 0, 2, 9, intel_xeon, "Intel Xeon (Prestonia D1)"),
    FMSQ(0, 15, 0, 2, 9, mobile_celeron,
         "Intel Mobile Celeron (Northwood D1)"),
    FMSQ(0, 15, 0, 2, 9, mobile_pentium,
         "Intel Mobile Pentium 4-M (Northwood D1)"),
    FMSQ(0, 15, 0, 2, 9, desktop_celeron, "Intel Celeron (Northwood D1)"),
    FMS(0, 15, 0, 2, 9, "Intel Pentium 4 (Northwood D1)"),
    FMQ(0, 15, 0, 2, netburst_xeon_l3, "Intel Xeon MP (Gallatin)"),
    FMQ(0, 15, 0, 2, intel_xeon, "Intel Xeon (Prestonia)"),
    FMQ(0, 15, 0, 2, mobile_pentium, "Intel Mobile Pentium 4-M (Northwood)"),
    FMQ(0, 15, 0, 2, desktop_celeron, "Intel Celeron (Northwood)"),
    FM(0, 15, 0, 2, "Intel Pentium 4 (Northwood)"),
    FMSQ(0, 15, 0, 3, 3, intel_xeon, "Intel Xeon (Nocona C0)"),
    FMSQ(0, 15, 0, 3, 3, desktop_celeron, "Intel Celeron D (Prescott C0)"),
    FMSQ(0, 15, 0, 3, 3, mobile_pentium,
         "Intel Mobile Pentium 4 (Prescott C0)"),
    FMS(0, 15, 0, 3, 3, "Intel Pentium 4 (Prescott C0)"),
    FMSQ(0, 15, 0, 3, 4, intel_xeon, "Intel Xeon (Nocona D0)"),
    FMSQ(0, 15, 0, 3, 4, desktop_celeron, "Intel Celeron D (Prescott D0)"),
    FMSQ(0, 15, 0, 3, 4, mobile_pentium,
         "Intel Mobile Pentium 4 (Prescott D0)"),
    FMS(0, 15, 0, 3, 4, "Intel Pentium 4 (Prescott D0)"),
    FMQ(0, 15, 0, 3, intel_xeon, "Intel Xeon (Nocona)"),
    FMQ(0, 15, 0, 3, desktop_celeron, "Intel Celeron D (Prescott)"),
    FM(0, 15, 0, 3, "Intel Pentium 4 (Prescott)"),
    FMSQ(0, 15, 0, 4, 1, intel_xeon_mp, "Intel Xeon MP (Cranford A0)"),
    FMSQ(0, 15, 0, 4, 1, intel_xeon, "Intel Xeon (Nocona E0)"),
    FMSQ(0, 15, 0, 4, 1, desktop_celeron, "Intel Celeron D (Prescott E0)"),
    FMSQ(0, 15, 0, 4, 1, mobile_pentium,
         "Intel Mobile Pentium 4 (Prescott E0)"),
    FMS(0, 15, 0, 4, 1, "Intel Pentium 4 (Prescott E0)"),
    FMSQ(0, 15, 0, 4, 3, intel_xeon, "Intel Xeon (Irwindale N0)"),
    FMSQ(0, 15, 0, 4, 3, desktop_celeron, "Intel Celeron D (Prescott N0)"),
    FMS(0, 15, 0, 4, 3, "Intel Pentium 4 (Prescott N0)"),
    FMSQ(0, 15, 0, 4, 4, intel_extreme,
         "Intel Pentium Extreme Edition (Smithfield A0)"),
    FMS(0, 15, 0, 4, 4, "Intel Pentium D (Smithfield A0)"),
    FMSQ(0, 15, 0, 4, 7, intel_extreme,
         "Intel Pentium Extreme Edition (Smithfield B0)"),
    FMS(0, 15, 0, 4, 7, "Intel Pentium D (Smithfield B0)"),
    FMSQ(0, 15, 0, 4, 8, intel_xeon_mp, "Intel Xeon MP (Potomac C0)"),
    FMS(0, 15, 0, 4, 8, "Intel Pentium D (Smithfield C0)"),
    FMSQ(0, 15, 0, 4, 9, intel_xeon, "Intel Xeon (Irwindale G1)"),
    FMSQ(0, 15, 0, 4, 9, desktop_celeron, "Intel Celeron D (Prescott G1)"),
    FMS(0, 15, 0, 4, 9, "Intel Pentium 4 (Prescott G1)"),
    FMSQ(0, 15, 0, 4, 10, intel_xeon, "Intel Xeon (Irwindale R0)"),
    FMSQ(0, 15, 0, 4, 10, desktop_celeron, "Intel Celeron D (Prescott R0)"),
    FMS(0, 15, 0, 4, 10, "Intel Pentium 4 (Prescott R0)"),
    FMQ(0, 15, 0, 4, intel_xeon_mp, "Intel Xeon MP (Cranford/Potomac)"),
    FMQ(0, 15, 0, 4, intel_xeon, "Intel Xeon (Nocona/Irwindale)"),
    FMQ(0, 15, 0, 4, intel_pentium_d, "Intel Pentium D (Smithfield)"),
    FMQ(0, 15, 0, 4, desktop_celeron, "Intel Celeron D (Prescott)"),
    FM(0, 15, 0, 4, "Intel Pentium 4 (Prescott)"),
    FMSQ(0, 15, 0, 6, 2, intel_xeon, "Intel Xeon 5000 (Dempsey B1)"),
    FMSQ(0, 15, 0, 6, 2, intel_extreme,
         "Intel Pentium Extreme Edition 955 / 965 (Presler B1)"),
    FMSQ(0, 15, 0, 6, 2, intel_pentium_d, "Intel Pentium D 900 (Presler B1)"),
    FMSQ(0, 15, 0, 6, 2, desktop_celeron,
         "Intel Celeron D 300 (Cedar Mill B1)"),
    FMS(0, 15, 0, 6, 2, "Intel Pentium 4 (Cedar Mill B1)"),
    FMSQ(0, 15, 0, 6, 4, intel_xeon, "Intel Xeon 5000 (Dempsey C1)"),
    FMSQ(0, 15, 0, 6, 4, intel_extreme,
         "Intel Pentium Extreme Edition 965 (Presler C1)"),
    FMSQ(0, 15, 0, 6, 4, intel_pentium_d, "Intel Pentium D 900 (Presler C1)"),
    FMSQ(0, 15, 0, 6, 4, desktop_celeron,
         "Intel Celeron D 300 (Cedar Mill C1)"),
    FMS(0, 15, 0, 6, 4, "Intel Pentium 4 (Cedar Mill C1)"),
    FMSQ(0, 15, 0, 6, 5, desktop_celeron,
         "Intel Celeron D 300 (Cedar Mill D0)"),
    FMS(0, 15, 0, 6, 5, "Intel Pentium 4 (Cedar Mill D0)"),
    FMSQ(0, 15, 0, 6, 8, intel_xeon_mp, "Intel Xeon 7100 (Tulsa B0)"),
    FMQ(0, 15, 0, 6, intel_xeon_mp, "Intel Xeon 7100 (Tulsa)"),
    FMQ(0, 15, 0, 6, intel_xeon, "Intel Xeon 5000 (Dempsey)"),
    FMQ(0, 15, 0, 6, intel_pentium_d, "Intel Pentium D 900 (Presler)"),
    FMQ(0, 15, 0, 6, desktop_celeron, "Intel Celeron D 300 (Cedar Mill)"),
    FM(0, 15, 0, 6, "Intel Pentium 4 (Cedar Mill)"),
    F(0, 15, "Intel Pentium 4 / Pentium D / Xeon / Xeon MP / Celeron"
             " / Celeron D (unknown model)"),

    # Family 0x11: Itanium 2
    FM(1, 15, 0, 0, "Intel Itanium 2 (McKinley)"),
    FM(1, 15, 0, 1, "Intel Itanium 2 (Madison/Deerfield/Hondo)"),
    FM(1, 15, 0, 2, "Intel Itanium 2 (Madison 9M/Fanwood)"),
    F(1, 15, "Intel Itanium 2 (unknown model)"),

    # Family 0x12: Nova Lake
    FM(3, 15, 0, 1, "Intel Core Ultra (Nova Lake-S)"),
    FM(3, 15, 0, 3, "Intel Core Ultra (Nova Lake-H)"),
    F(3, 15, "Intel Core Ultra (unknown model)"),

    # Family 0x13: Diamond Rapids
    FM(4, 15, 0, 1, "Intel Xeon (Diamond Rapids)"),
    F(4, 15, "Intel Xeon (unknown model)"),

    # Family 0x20: Dual-Core Itanium
    FM(0x11, 15, 0, 0, "Intel Dual-Core Itanium 2 (Montecito)"),
    FM(0x11, 15, 0, 1, "Intel Dual-Core Itanium 2 (Montvale)"),
    FM(0x11, 15, 0, 2, "Intel Itanium 9300 (Tukwila)"),
    F(0x11, 15, "Intel Itanium (unknown model)"),

    # Family 0x21: Itanium 9500
    FM(0x12, 15, 0, 0, "Intel Itanium 9500 (Poulson)"),
    FM(0x12, 15, 0, 1, "Intel Itanium 9700 (Kittson)"),
    F(0x12, 15, "Intel Itanium (unknown model)"),
]

INTEL_TABLE = RuleTable("intel", INTEL_RULES, default="unknown")
