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
:mod:`cpuid_decoder.amd_model` -- AMD processor name reconstruction
===================================================================

AMD parts carry packed brand ID fields from which the BIOS is expected to
build the processor name string. The tables below are the "Constructing
the Processor Name String" tables of the AMD revision guides:

* 25759, Athlon 64 and Opteron (family 0Fh before revision F);
* 33610, NPT family 0Fh (revisions F and G);
* 41322 and 48931, families 10h and 15h.

The arithmetic offsets (``22 + NN``, ``38 + 2*NN`` and so on) are the
published constants of each table.
"""

from collections import namedtuple
import logging

from cpuid_decoder.lib.bit import bit_value


logger = logging.getLogger(__name__)

AmdModel = namedtuple("AmdModel", "brand_pre brand_post proc")


# ---------------------------------------------------------------------------
# Family 0Fh before revision F: brand table index (BTI) and NN
# ---------------------------------------------------------------------------

def k8_offsets(nn):
    return {
        "XX": 22 + nn,
        "YY": 38 + 2 * nn,
        "ZZ": 24 + nn,
        "TT": 24 + nn,
        "RR": 45 + 5 * nn,
        "EE": 9 + nn,
    }


# bti: (brand_pre, proc format, brand_post)
K8_NAMES = {
    0x04: ("AMD Athlon(tm) 64", "Processor {XX:02d}00+", None),
    0x05: ("AMD Athlon(tm) 64 X2 Dual Core", "Processor {XX:02d}00+", None),
    0x06: ("AMD Athlon(tm) 64", "FX-{ZZ:02d}", "Dual Core"),
    0x08: ("Mobile AMD Athlon(tm) 64", "Processor {XX:02d}00+", None),
    0x09: ("Mobile AMD Athlon(tm) 64", "Processor {XX:02d}00+", None),
    0x0a: ("AMD Turion(tm) 64 Mobile Technology", "ML-{XX:02d}", None),
    0x0b: ("AMD Turion(tm) 64 Mobile Technology", "MT-{XX:02d}", None),
    0x0c: ("AMD Opteron(tm)", "Processor 1{YY:02d}", None),
    0x0d: ("AMD Opteron(tm)", "Processor 1{YY:02d}", None),
    0x0e: ("AMD Opteron(tm)", "Processor 1{YY:02d} HE", None),
    0x0f: ("AMD Opteron(tm)", "Processor 1{YY:02d} EE", None),
    0x10: ("AMD Opteron(tm)", "Processor 2{YY:02d}", None),
    0x11: ("AMD Opteron(tm)", "Processor 2{YY:02d}", None),
    0x12: ("AMD Opteron(tm)", "Processor 2{YY:02d} HE", None),
    0x13: ("AMD Opteron(tm)", "Processor 2{YY:02d} EE", None),
    0x14: ("AMD Opteron(tm)", "Processor 8{YY:02d}", None),
    0x15: ("AMD Opteron(tm)", "Processor 8{YY:02d}", None),
    0x16: ("AMD Opteron(tm)", "Processor 8{YY:02d} HE", None),
    0x17: ("AMD Opteron(tm)", "Processor 8{YY:02d} EE", None),
    0x18: ("AMD Athlon(tm) 64", "Processor {EE:02d}00+", None),
    0x1d: ("Mobile AMD Athlon(tm) XP-M", "Processor {XX:02d}00+", None),
    0x1e: ("Mobile AMD Athlon(tm) XP-M", "Processor {XX:02d}00+", None),
    0x20: ("AMD Athlon(tm) XP", "Processor {XX:02d}00+", None),
    0x21: ("Mobile AMD Sempron(tm)", "Processor {TT:02d}00+", None),
    0x22: ("AMD Sempron(tm)", "Processor {TT:02d}00+", None),
    0x23: ("Mobile AMD Sempron(tm)", "Processor {TT:02d}00+", None),
    0x24: ("AMD Athlon(tm) 64", "FX-{ZZ:02d}", None),
    0x26: ("AMD Sempron(tm)", "Processor {TT:02d}00+", None),
    0x29: ("Dual Core AMD Opteron(tm)", "Processor 1{RR:02d} SE", None),
    0x2a: ("Dual Core AMD Opteron(tm)", "Processor 2{RR:02d} SE", None),
    0x2b: ("Dual Core AMD Opteron(tm)", "Processor 8{RR:02d} SE", None),
    0x2c: ("Dual Core AMD Opteron(tm)", "Processor 1{RR:02d}", None),
    0x2d: ("Dual Core AMD Opteron(tm)", "Processor 1{RR:02d}", None),
    0x2e: ("Dual Core AMD Opteron(tm)", "Processor 1{RR:02d} HE", None),
    0x2f: ("Dual Core AMD Opteron(tm)", "Processor 1{RR:02d} EE", None),
    0x30: ("Dual Core AMD Opteron(tm)", "Processor 2{RR:02d}", None),
    0x31: ("Dual Core AMD Opteron(tm)", "Processor 2{RR:02d}", None),
    0x32: ("Dual Core AMD Opteron(tm)", "Processor 2{RR:02d} HE", None),
    0x33: ("Dual Core AMD Opteron(tm)", "Processor 2{RR:02d} EE", None),
    0x34: ("Dual Core AMD Opteron(tm)", "Processor 8{RR:02d}", None),
    0x35: ("Dual Core AMD Opteron(tm)", "Processor 8{RR:02d}", None),
    0x36: ("Dual Core AMD Opteron(tm)", "Processor 8{RR:02d} HE", None),
    0x37: ("Dual Core AMD Opteron(tm)", "Processor 8{RR:02d} EE", None),
    0x38: ("Mobile AMD Athlon(tm) 64", "Processor {XX:02d}00+", None),
}


def _decode_k8(stash):
    low_byte = bit_value(stash.val_1_ebx, 0, 7)
    if low_byte:
        bti = bit_value(low_byte, 5, 7) << 2
        nn = bit_value(low_byte, 0, 4)
    elif bit_value(stash.val_80000001_ebx, 0, 11):
        bti = bit_value(stash.val_80000001_ebx, 6, 11)
        nn = bit_value(stash.val_80000001_ebx, 0, 5)
    else:
        return None
    entry = K8_NAMES.get(bti)
    logger.debug("K8 brand fields: bti=%#x NN=%d", bti, nn)
    if entry is None:
        return None
    brand_pre, proc, brand_post = entry
    return AmdModel(brand_pre, brand_post, proc.format(**k8_offsets(nn)))


# ---------------------------------------------------------------------------
# NPT family 0Fh: package type, CmpCap, BTI and PwrLmt
# ---------------------------------------------------------------------------

def NPT(pkgtype, cmpcap, bti, pwrlmt):
    return (pkgtype << 11) + (cmpcap << 9) + (bti << 4) + pwrlmt


def npt_offsets(nn, cmpcap):
    return {
        "RR": nn - 1,
        "PP": 26 + nn,
        "TT": 15 + cmpcap * 10 + nn,
        "ZZ": 57 + nn,
        "YY": 29 + nn,
    }


_OPTERON = "AMD Opteron(tm)"
_DC_OPTERON = "Dual-Core AMD Opteron(tm)"

NPT_NAMES = {
    # Fr3 (1207) and F (1207)
    NPT(1, 0, 1, 2): (_OPTERON, "Processor 22{RR:02d} EE", None),
    NPT(1, 1, 1, 2): (_DC_OPTERON, "Processor 22{RR:02d} EE", None),
    NPT(1, 1, 0, 2): (_DC_OPTERON, "Processor 12{RR:02d} EE", None),
    NPT(1, 1, 0, 6): (_DC_OPTERON, "Processor 12{RR:02d} HE", None),
    NPT(1, 1, 1, 6): (_DC_OPTERON, "Processor 22{RR:02d} HE", None),
    NPT(1, 1, 1, 10): (_DC_OPTERON, "Processor 22{RR:02d}", None),
    NPT(1, 1, 1, 12): (_DC_OPTERON, "Processor 22{RR:02d} SE", None),
    NPT(1, 1, 4, 2): (_DC_OPTERON, "Processor 82{RR:02d} EE", None),
    NPT(1, 1, 4, 6): (_DC_OPTERON, "Processor 82{RR:02d} HE", None),
    NPT(1, 1, 4, 10): (_DC_OPTERON, "Processor 82{RR:02d}", None),
    NPT(1, 1, 4, 12): (_DC_OPTERON, "Processor 82{RR:02d} SE", None),
    NPT(1, 1, 6, 14): ("AMD Athlon(tm) 64", "FX-{ZZ:02d}", None),
    # AM2 and ASB1
    NPT(3, 0, 1, 5): ("AMD Sempron(tm)", "Processor LE-1{RR:02d}0", None),
    NPT(3, 0, 2, 6): ("AMD Athlon(tm)", "Processor LE-1{ZZ:02d}0", None),
    NPT(3, 0, 3, 6): ("AMD Athlon(tm)", "Processor 1{ZZ:02d}0B", None),
    NPT(3, 0, 4, 1): ("AMD Athlon(tm) 64", "Processor {TT:02d}00+", None),
    NPT(3, 0, 4, 2): ("AMD Athlon(tm) 64", "Processor {TT:02d}00+", None),
    NPT(3, 0, 4, 3): ("AMD Athlon(tm) 64", "Processor {TT:02d}00+", None),
    NPT(3, 0, 4, 4): ("AMD Athlon(tm) 64", "Processor {TT:02d}00+", None),
    NPT(3, 0, 4, 5): ("AMD Athlon(tm) 64", "Processor {TT:02d}00+", None),
    NPT(3, 0, 4, 6): ("AMD Athlon(tm) 64", "Processor {TT:02d}00+", None),
    NPT(3, 0, 4, 7): ("AMD Athlon(tm) 64", "Processor {TT:02d}00+", None),
    NPT(3, 0, 4, 8): ("AMD Athlon(tm) 64", "Processor {TT:02d}00+", None),
    NPT(3, 0, 5, 2): ("AMD Sempron(tm)", "Processor {RR:02d}50p", None),
    NPT(3, 0, 6, 4): ("AMD Sempron(tm)", "Processor {TT:02d}00+", None),
    NPT(3, 0, 6, 8): ("AMD Sempron(tm)", "Processor {TT:02d}00+", None),
    NPT(3, 0, 7, 1): ("AMD Sempron(tm)", "Processor {TT:02d}0U", None),
    NPT(3, 0, 7, 2): ("AMD Sempron(tm)", "Processor {TT:02d}0U", None),
    NPT(3, 0, 8, 2): ("AMD Athlon(tm)", "Processor {TT:02d}50e", None),
    NPT(3, 0, 8, 3): ("AMD Athlon(tm)", "Processor {TT:02d}50e", None),
    NPT(3, 0, 9, 2): ("AMD Athlon(tm) Neo", "Processor MV-{TT:02d}", None),
    NPT(3, 0, 12, 2): ("AMD Sempron(tm)", "Processor 2{RR:02d}U", None),
    NPT(3, 1, 1, 6): (_DC_OPTERON, "Processor 12{RR:02d} HE", None),
    NPT(3, 1, 1, 10): (_DC_OPTERON, "Processor 12{RR:02d}", None),
    NPT(3, 1, 1, 12): (_DC_OPTERON, "Processor 12{RR:02d} SE", None),
    NPT(3, 1, 3, 3): ("AMD Athlon(tm) X2 Dual Core",
                      "Processor BE-2{TT:02d}0", None),
    NPT(3, 1, 4, 1): ("AMD Athlon(tm) 64 X2 Dual Core",
                      "Processor {TT:02d}00+", None),
    NPT(3, 1, 4, 2): ("AMD Athlon(tm) 64 X2 Dual Core",
                      "Processor {TT:02d}00+", None),
    NPT(3, 1, 4, 6): ("AMD Athlon(tm) 64 X2 Dual Core",
                      "Processor {TT:02d}00+", None),
    NPT(3, 1, 4, 8): ("AMD Athlon(tm) 64 X2 Dual Core",
                      "Processor {TT:02d}00+", None),
    NPT(3, 1, 4, 12): ("AMD Athlon(tm) 64 X2 Dual Core",
                       "Processor {TT:02d}00+", None),
    NPT(3, 1, 5, 12): ("AMD Athlon(tm) 64", "FX-{ZZ:02d}", "Dual Core"),
    NPT(3, 1, 6, 6): ("AMD Sempron(tm) Dual Core",
                      "Processor {RR:02d}00", None),
    NPT(3, 1, 7, 3): ("AMD Athlon(tm) Dual Core",
                      "Processor {TT:02d}50e", None),
    NPT(3, 1, 7, 6): ("AMD Athlon(tm) Dual Core",
                      "Processor {TT:02d}00B", None),
    NPT(3, 1, 7, 7): ("AMD Athlon(tm) Dual Core",
                      "Processor {TT:02d}00B", None),
    NPT(3, 1, 8, 3): ("AMD Athlon(tm) Dual Core",
                      "Processor {TT:02d}50B", None),
    NPT(3, 1, 9, 1): ("AMD Athlon(tm) X2 Dual Core",
                      "Processor {TT:02d}50e", None),
    NPT(3, 1, 10, 1): ("AMD Athlon(tm) Neo X2 Dual Core",
                       "Processor {TT:02d}50e", None),
    NPT(3, 1, 10, 2): ("AMD Athlon(tm) Neo X2 Dual Core",
                       "Processor {TT:02d}50e", None),
    NPT(3, 1, 11, 0): ("AMD Turion(tm) Neo X2 Dual Core",
                       "Processor L6{RR:02d}", None),
    NPT(3, 1, 12, 0): ("AMD Turion(tm) Neo X2 Dual Core",
                       "Processor L3{RR:02d}", None),
    # S1g1
    NPT(0, 0, 1, 2): ("AMD Athlon(tm) 64", "Processor {TT:02d}00+", None),
    NPT(0, 0, 2, 12): ("AMD Turion(tm) 64 Mobile Technology",
                       "MK-{YY:02d}", None),
    NPT(0, 0, 3, 1): ("Mobile AMD Sempron(tm)",
                      "Processor {TT:02d}00+", None),
    NPT(0, 0, 3, 6): ("Mobile AMD Sempron(tm)",
                      "Processor {TT:02d}00+", None),
    NPT(0, 0, 3, 12): ("Mobile AMD Sempron(tm)",
                       "Processor {TT:02d}00+", None),
    NPT(0, 0, 4, 2): ("AMD Sempron(tm)", "Processor {TT:02d}00+", None),
    NPT(0, 0, 6, 4): ("AMD Athlon(tm)", "Processor TF-{TT:02d}", None),
    NPT(0, 0, 6, 6): ("AMD Athlon(tm)", "Processor TF-{TT:02d}", None),
    NPT(0, 0, 6, 12): ("AMD Athlon(tm)", "Processor TF-{TT:02d}", None),
    NPT(0, 0, 7, 3): ("AMD Athlon(tm)", "Processor L1{RR:02d}", None),
    NPT(0, 1, 1, 12): ("AMD Sempron(tm)", "Processor TJ-{YY:02d}", None),
    NPT(0, 1, 2, 12): ("AMD Turion(tm) 64 X2 Mobile Technology",
                       "Processor TL-{YY:02d}", None),
    NPT(0, 1, 3, 4): ("AMD Turion(tm) 64 X2 Dual-Core",
                      "Processor TK-{YY:02d}", None),
    NPT(0, 1, 3, 12): ("AMD Turion(tm) 64 X2 Dual-Core",
                       "Processor TK-{YY:02d}", None),
    NPT(0, 1, 5, 4): ("AMD Turion(tm) 64 X2 Dual Core",
                      "Processor {TT:02d}00+", None),
    NPT(0, 1, 6, 2): ("AMD Turion(tm) X2 Dual Core",
                      "Processor L3{RR:02d}", None),
    NPT(0, 1, 7, 4): ("AMD Turion(tm) X2 Dual Core",
                      "Processor L5{RR:02d}", None),
}


def _decode_npt(stash):
    ebx = stash.val_80000001_ebx
    pwrlmt = (bit_value(ebx, 6, 8) << 1) + bit_value(ebx, 14, 14)
    bti = bit_value(ebx, 9, 13)
    nn = (bit_value(ebx, 15, 15) << 5) + bit_value(ebx, 0, 4)
    pkgtype = bit_value(stash.val_80000001_eax, 4, 5)
    cmpcap = 1 if bit_value(stash.val_80000008_ecx, 0, 7) > 0 else 0
    logger.debug("NPT brand fields: pkgtype=%d cmpcap=%d bti=%#x"
                 " pwrlmt=%d NN=%d", pkgtype, cmpcap, bti, pwrlmt, nn)
    entry = NPT_NAMES.get(NPT(pkgtype, cmpcap, bti, pwrlmt))
    if entry is None:
        return None
    brand_pre, proc, brand_post = entry
    return AmdModel(brand_pre, brand_post,
                    proc.format(**npt_offsets(nn, cmpcap)))


# ---------------------------------------------------------------------------
# Families 10h and 15h: String1, String2, PartialModel
# ---------------------------------------------------------------------------

def K10(pkgtype, nc, pg, str1):
    return (pkgtype << 13) + (nc << 5) + (pg << 4) + str1


# String1: (brand_pre, leading model digits)
K10_STRING1 = {
    0x10: {
        # Fr2, Fr5 and Fr6 (1207)
        K10(0, 3, 0, 0): ("Quad-Core AMD Opteron(tm) Processor", "83"),
        K10(0, 3, 0, 1): ("Quad-Core AMD Opteron(tm) Processor", "23"),
        K10(0, 3, 1, 0): ("Quad-Core AMD Opteron(tm) Processor", "84"),
        K10(0, 3, 1, 1): ("Quad-Core AMD Opteron(tm) Processor", "24"),
        K10(0, 3, 1, 2): ("Embedded AMD Opteron(tm) Processor", ""),
        K10(0, 5, 0, 0): ("Six-Core AMD Opteron(tm) Processor", "84"),
        K10(0, 5, 0, 1): ("Six-Core AMD Opteron(tm) Processor", "24"),
        K10(0, 5, 1, 2): ("Embedded AMD Opteron(tm) Processor", ""),
        # AM2r2 and AM3
        K10(1, 0, 0, 2): ("AMD Sempron(tm) Processor", "1"),
        K10(1, 0, 0, 3): ("AMD Athlon(tm) II Processor", "1"),
        K10(1, 1, 0, 1): ("AMD Athlon(tm) II X2", "2"),
        K10(1, 1, 0, 3): ("AMD Phenom(tm) II X2", "5"),
        K10(1, 2, 0, 1): ("AMD Phenom(tm) II X3", "7"),
        K10(1, 2, 0, 2): ("AMD Athlon(tm) II X3", "4"),
        K10(1, 3, 0, 0): ("Quad-Core AMD Opteron(tm) Processor", "13"),
        K10(1, 3, 0, 2): ("AMD Phenom(tm) Quad-Core Processor", "9"),
        K10(1, 3, 0, 3): ("AMD Phenom(tm) II X4", "9"),
        K10(1, 3, 0, 4): ("AMD Phenom(tm) II X4", "8"),
        K10(1, 3, 0, 5): ("AMD Athlon(tm) II X4", "6"),
        # S1g3 and S1g4
        K10(2, 0, 0, 0): ("AMD Sempron(tm) M", "1"),
        K10(2, 1, 0, 0): ("AMD Turion(tm) II Ultra Dual-Core Mobile M",
                          "6"),
        K10(2, 1, 0, 1): ("AMD Turion(tm) II Dual-Core Mobile M", "5"),
        K10(2, 1, 0, 2): ("AMD Athlon(tm) II Dual-Core M", "3"),
        # G34
        K10(3, 7, 0, 0): ("AMD Opteron(tm) Processor", "61"),
        K10(3, 11, 0, 0): ("AMD Opteron(tm) Processor", "61"),
        K10(3, 7, 1, 0): ("Embedded AMD Opteron(tm) Processor", ""),
        # C32
        K10(5, 3, 0, 0): ("AMD Opteron(tm) Processor", "41"),
        K10(5, 5, 0, 0): ("AMD Opteron(tm) Processor", "41"),
        K10(5, 5, 1, 0): ("Embedded AMD Opteron(tm) Processor", ""),
    },
    0x15: {
        # G34
        K10(3, 3, 0, 0): ("AMD Opteron(tm) Processor", "62"),
        K10(3, 7, 0, 0): ("AMD Opteron(tm) Processor", "62"),
        K10(3, 11, 0, 0): ("AMD Opteron(tm) Processor", "62"),
        K10(3, 15, 0, 0): ("AMD Opteron(tm) Processor", "62"),
        K10(3, 3, 0, 1): ("AMD Opteron(tm) Processor", "63"),
        K10(3, 7, 0, 1): ("AMD Opteron(tm) Processor", "63"),
        K10(3, 11, 0, 1): ("AMD Opteron(tm) Processor", "63"),
        K10(3, 15, 0, 1): ("AMD Opteron(tm) Processor", "63"),
        # C32
        K10(5, 3, 0, 0): ("AMD Opteron(tm) Processor", "42"),
        K10(5, 5, 0, 0): ("AMD Opteron(tm) Processor", "42"),
        K10(5, 7, 0, 0): ("AMD Opteron(tm) Processor", "42"),
        K10(5, 3, 0, 1): ("AMD Opteron(tm) Processor", "43"),
        K10(5, 5, 0, 1): ("AMD Opteron(tm) Processor", "43"),
        K10(5, 7, 0, 1): ("AMD Opteron(tm) Processor", "43"),
    },
}

# String2: (pkgtype, str2) -> suffix
K10_STRING2 = {
    (0, 10): "SE",
    (0, 11): "HE",
    (0, 12): "EE",
    (1, 10): "e",
    (1, 11): "u",
    (3, 1): "SE",
    (3, 2): "HE",
    (3, 3): "EE",
    (5, 1): "SE",
    (5, 2): "HE",
    (5, 3): "EE",
}


def _decode_k10(stash, family):
    ebx = stash.val_80000001_ebx
    str2 = bit_value(ebx, 0, 3)
    partial_model = bit_value(ebx, 4, 10)
    str1 = bit_value(ebx, 11, 14)
    pg = bit_value(ebx, 15, 15)
    pkgtype = bit_value(ebx, 28, 31)
    nc = bit_value(stash.val_80000008_ecx, 0, 7)
    logger.debug("family %#x brand fields: pkgtype=%d nc=%d pg=%d str1=%d"
                 " str2=%d partial model=%d", family, pkgtype, nc, pg, str1,
                 str2, partial_model)
    entry = K10_STRING1[family].get(K10(pkgtype, nc, pg, str1))
    if entry is None:
        return None
    brand_pre, digits = entry
    proc = "{}{:02d}".format(digits, partial_model) if digits else ""
    return AmdModel(brand_pre, K10_STRING2.get((pkgtype, str2)), proc)


def decode_amd_model(stash):
    """
    Rebuild the AMD name of the processor in ``stash``.

    Returns an :class:`AmdModel` or ``None`` when the packed fields do not
    name any documented part.
    """
    key = stash.key
    family = key.synth_family
    if family == 0xf:
        if key.extended_model < 4:
            return _decode_k8(stash)
        return _decode_npt(stash)
    if family in K10_STRING1:
        return _decode_k10(stash, family)
    return None
