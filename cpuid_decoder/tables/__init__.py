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
:mod:`cpuid_decoder.tables` -- rule tables by vendor
====================================================

:data:`SYNTH_TABLES` maps each vendor to its model name table and
:data:`UARCH_TABLES` to its microarchitecture table. Unknown vendors have
neither; vendors missing from :data:`UARCH_TABLES` have no annotation.
"""

from cpuid_decoder.tables.amd import AMD_TABLE
from cpuid_decoder.tables.hygon import HYGON_TABLE
from cpuid_decoder.tables.intel import INTEL_TABLE
from cpuid_decoder.tables.others import (
    CYRIX_TABLE,
    NEXGEN_TABLE,
    NSC_TABLE,
    RDC_TABLE,
    RISE_TABLE,
    SIS_TABLE,
    TRANSMETA_TABLE,
    UMC_TABLE,
    VIA_TABLE,
    VORTEX_TABLE,
    ZHAOXIN_TABLE,
)
from cpuid_decoder.tables.uarch import (
    AMD_UARCH_TABLE,
    CYRIX_UARCH_TABLE,
    HYGON_UARCH_TABLE,
    INTEL_UARCH_TABLE,
    NSC_UARCH_TABLE,
    TRANSMETA_UARCH_TABLE,
    VIA_UARCH_TABLE,
    ZHAOXIN_UARCH_TABLE,
)
from cpuid_decoder.vendor import Vendor


SYNTH_TABLES = {
    Vendor.INTEL: INTEL_TABLE,
    Vendor.AMD: AMD_TABLE,
    Vendor.CYRIX: CYRIX_TABLE,
    Vendor.VIA: VIA_TABLE,
    Vendor.TRANSMETA: TRANSMETA_TABLE,
    Vendor.UMC: UMC_TABLE,
    Vendor.NEXGEN: NEXGEN_TABLE,
    Vendor.RISE: RISE_TABLE,
    Vendor.SIS: SIS_TABLE,
    Vendor.NSC: NSC_TABLE,
    Vendor.VORTEX: VORTEX_TABLE,
    Vendor.RDC: RDC_TABLE,
    Vendor.HYGON: HYGON_TABLE,
    Vendor.ZHAOXIN: ZHAOXIN_TABLE,
}

UARCH_TABLES = {
    Vendor.INTEL: INTEL_UARCH_TABLE,
    Vendor.AMD: AMD_UARCH_TABLE,
    Vendor.CYRIX: CYRIX_UARCH_TABLE,
    Vendor.VIA: VIA_UARCH_TABLE,
    Vendor.TRANSMETA: TRANSMETA_UARCH_TABLE,
    Vendor.NSC: NSC_UARCH_TABLE,
    Vendor.HYGON: HYGON_UARCH_TABLE,
    Vendor.ZHAOXIN: ZHAOXIN_UARCH_TABLE,
}


def synth_table(vendor):
    return SYNTH_TABLES.get(vendor)


def uarch_table(vendor):
    return UARCH_TABLES.get(vendor)
