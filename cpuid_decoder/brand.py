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
:mod:`cpuid_decoder.brand` -- brand string analysis
===================================================

The brand string assembled from leaves 0x80000002-0x80000004 is scanned
for marketing names. Every test is independent, so a string can be both
"mobile" and "Celeron" at the same time. An empty or garbled string just
leaves every flag unset.
"""

import logging
import re

from cpuid_decoder.lib.frozen import Freezable
from cpuid_decoder.vendor import Vendor


logger = logging.getLogger(__name__)

# Marker used by BIOSes that could not name an AMD processor
AMD_MODEL_UNKNOWN = "model unknown"

INTEL_U_LINE_RE = re.compile(r"Core.* [im][3579]-[0-9]{4,5}[A-Z]*U")
INTEL_Y_LINE_RE = re.compile(r"Core.* [im][3579]-[0-9]{4,5}[A-Z]*Y|"
                             r"Core.* m[357]-")
INTEL_G_LINE_RE = re.compile(r"Core.* i[3579]-[0-9]{4,5}G[0-9]")
# Mobile parts: M, QM, XM, MQ, MX, H, HQ, HK and HX model suffixes
INTEL_MOBILE_RE = re.compile(
    r"Core.* [im][3579]-[0-9]{4,5}(?:M|QM|XM|MQ|MX|H|HQ|HK|HX)\b")
INTEL_8000_RE = re.compile(r"Core.* [im][3579]-8[0-9]{3}")
INTEL_10000_RE = re.compile(r"Core.* i[3579]-10[0-9]{3}")
INTEL_EXTREME_RE = re.compile(r"Extreme|Core.* i[579]-[0-9]{4,5}X")
INTEL_SCALABLE_RE = re.compile(r"Xeon.* (Bronze|Silver|Gold|Platinum)")
INTEL_PENTIUM_RE = re.compile(
    r"Pentium(?:\(R\)|\(TM\)|\(r\)|\(tm\)|®)?\s*"
    r"(?:(III|II|4|M|D|E|Silver|Gold)\b)?")

AMD_T_SUFFIX_RE = re.compile(r"[0-9]+T\b")
AMD_EPYC_3000_RE = re.compile(r"EPYC[^0-9]*3[0-9]{3}")
AMD_CORE_COUNT_RE = re.compile(r"\b([0-9]+)-Core")
AMD_CORE_WORDS = (
    ("Dual-Core", 2), ("Dual Core", 2), ("Triple-Core", 3),
    ("Quad-Core", 4), ("Quad Core", 4), ("Six-Core", 6), ("Hexa-Core", 6),
    ("Eight-Core", 8), ("Octa-Core", 8), ("Twelve-Core", 12),
    ("Sixteen-Core", 16),
)


class BrandFlags(Freezable):
    """
    Booleans derived from the brand string.

    Intel: celeron, core, pentium (with the ``pentium_tier`` string), atom,
    xeon, xeon_mp, pentium_m, pentium_d, extreme, generic, scalable,
    u_line, y_line, g_line, i_8000, i_10000, cc150.

    AMD and Hygon: athlon, athlon_lv, athlon_xp, athlon_fx, athlon_mp,
    duron, duron_mp, sempron, opteron, phenom, turion, neo, series, geode,
    fx, firepro, ultra, t_suffix, ryzen, epyc, epyc_3000, embedded,
    hygon_server (the C86 7000 server line, Hygon only).

    VIA and Zhaoxin: c7_m, eden, nano.

    Shared: mobile, and ``cores``, the core count spelled out in the
    string (0 when the string says nothing about it).
    """

    INTEL_FLAGS = (
        "celeron", "core", "pentium", "atom", "xeon", "xeon_mp", "pentium_m",
        "pentium_d", "extreme", "generic", "scalable", "u_line", "y_line",
        "g_line", "i_8000", "i_10000", "cc150",
    )
    AMD_FLAGS = (
        "athlon", "athlon_lv", "athlon_xp", "athlon_fx", "athlon_mp",
        "duron", "duron_mp", "sempron", "opteron", "phenom", "turion", "neo",
        "series", "geode", "fx", "firepro", "ultra", "t_suffix", "ryzen",
        "epyc", "epyc_3000", "embedded", "hygon_server",
    )
    VIA_FLAGS = ("c7_m", "eden", "nano")

    def __init__(self):
        self.mobile = False
        self.cores = 0
        self.pentium_tier = ""
        for flag in self.INTEL_FLAGS + self.AMD_FLAGS + self.VIA_FLAGS:
            setattr(self, flag, False)

    def as_dict(self):
        data = {"mobile": self.mobile, "cores": self.cores}
        for flag in self.INTEL_FLAGS + self.AMD_FLAGS + self.VIA_FLAGS:
            if getattr(self, flag):
                data[flag] = True
        if self.pentium_tier:
            data["pentium_tier"] = self.pentium_tier
        return data

    def __repr__(self):
        return "<BrandFlags {}>".format(
            " ".join(sorted(k for k, v in self.as_dict().items()
                            if v is True)) or "-")


# Brand index from leaf 1 EBX[7:0] on parts without a brand string.
# Entries with a tuple are renamed for the listed signatures.
INTEL_BRAND_INDEX = {
    0x01: "Intel(R) Celeron(R) processor",
    0x02: "Intel(R) Pentium(R) III processor",
    0x03: ("Intel(R) Pentium(R) III Xeon(R) processor",
           {0x6b1: "Intel(R) Celeron(R) processor"}),
    0x04: "Intel(R) Pentium(R) III processor",
    0x06: "Mobile Intel(R) Pentium(R) III processor-M",
    0x07: "Mobile Intel(R) Celeron(R) processor",
    0x08: ("Intel(R) Pentium(R) 4 processor",
           {0xf13: "Intel(R) Celeron(R) processor"}),
    0x09: "Intel(R) Pentium(R) 4 processor",
    0x0a: "Intel(R) Celeron(R) processor",
    0x0b: ("Intel(R) Xeon(R) processor",
           {0xf00: "Intel(R) Xeon(R) processor MP",
            0xf07: "Intel(R) Xeon(R) processor MP",
            0xf0a: "Intel(R) Xeon(R) processor MP",
            0xf11: "Intel(R) Xeon(R) processor MP",
            0xf12: "Intel(R) Xeon(R) processor MP"}),
    0x0c: "Intel(R) Xeon(R) processor MP",
    0x0e: ("Mobile Intel(R) Pentium(R) 4 processor-M",
           {0xf13: "Intel(R) Xeon(R) processor"}),
    0x0f: "Mobile Intel(R) Celeron(R) processor",
    0x11: "Mobile Genuine Intel(R) processor",
    0x12: "Intel(R) Celeron(R) M processor",
    0x13: "Mobile Intel(R) Celeron(R) processor",
    0x14: "Intel(R) Celeron(R) processor",
    0x15: "Mobile Genuine Intel(R) processor",
    0x16: "Intel(R) Pentium(R) M processor",
    0x17: "Mobile Intel(R) Celeron(R) processor",
}


def intel_brand_index_string(index, eax):
    """
    Marketing name for an Intel brand index, or an empty string.

    :param index: leaf 1 EBX[7:0]
    :param eax: leaf 1 EAX, some indices changed meaning between steppings
    """
    entry = INTEL_BRAND_INDEX.get(index)
    if entry is None:
        return ""
    if isinstance(entry, tuple):
        default, renames = entry
        return renames.get(eax & 0xfff, default)
    return entry


def clean_brand(raw):
    """
    Cut the brand string at the first NUL and strip padding blanks.
    """
    return raw.split("\x00", 1)[0].strip()


class BrandStringAnalyzer:
    """
    Populate :class:`BrandFlags` from a brand string.

    :param vendor:
        The :class:`~cpuid_decoder.vendor.Vendor` of the processor; it
        selects which family of substrings is meaningful.
    """

    def __init__(self, vendor):
        self.vendor = vendor

    def analyze(self, brand):
        flags = BrandFlags()
        if not brand:
            return flags
        if self.vendor is Vendor.INTEL:
            self._analyze_intel(brand, flags)
        elif self.vendor in (Vendor.AMD, Vendor.HYGON):
            self._analyze_amd(brand, flags)
        elif self.vendor in (Vendor.VIA, Vendor.ZHAOXIN):
            self._analyze_via(brand, flags)
        else:
            flags.mobile = "Mobile" in brand or "mobile" in brand
        logger.debug("brand %r analyzed as %r", brand, flags)
        return flags

    def override_brand(self, stash):
        """
        Synthesize a brand for AMD parts named "model unknown" by the BIOS.

        Some BIOSes decode the name from tables and feed it back into the
        processor; an old BIOS that does not know a newer processor leaves
        "AMD Processor model unknown". The brand ID fields are used to
        rebuild the name instead. Returns an empty string when nothing
        better can be said.
        """
        if self.vendor is not Vendor.AMD:
            return ""
        if AMD_MODEL_UNKNOWN not in stash.brand:
            return ""
        # Imported here to keep brand analysis importable on its own
        from cpuid_decoder.amd_model import decode_amd_model
        model = decode_amd_model(stash)
        if model is None or model.brand_pre is None:
            return ""
        parts = [model.brand_pre, model.proc]
        if model.brand_post is not None:
            parts.append(model.brand_post)
        override = " ".join(part for part in parts if part)
        logger.debug("AMD brand overridden with %r", override)
        return override

    def _analyze_intel(self, brand, flags):
        flags.mobile = "Mobile" in brand or "mobile" in brand
        flags.celeron = "Celeron" in brand
        flags.core = "Core(TM)" in brand or "Core(R)" in brand \
            or " Core " in brand
        flags.atom = "Atom" in brand
        flags.xeon_mp = ("Xeon MP" in brand or "Xeon(TM) MP" in brand
                         or "Xeon(R) MP" in brand)
        flags.xeon = "Xeon" in brand
        flags.generic = "Genuine Intel(R) CPU" in brand \
            or "Intel(R) Genuine processor" in brand
        flags.cc150 = "CC150" in brand
        match = INTEL_PENTIUM_RE.search(brand)
        if match:
            flags.pentium = True
            flags.pentium_tier = match.group(1) or ""
            flags.pentium_m = flags.pentium_tier == "M"
            flags.pentium_d = flags.pentium_tier == "D"
        flags.extreme = bool(INTEL_EXTREME_RE.search(brand))
        flags.scalable = bool(INTEL_SCALABLE_RE.search(brand))
        flags.u_line = bool(INTEL_U_LINE_RE.search(brand))
        flags.y_line = bool(INTEL_Y_LINE_RE.search(brand))
        flags.g_line = bool(INTEL_G_LINE_RE.search(brand))
        flags.i_8000 = bool(INTEL_8000_RE.search(brand))
        flags.i_10000 = bool(INTEL_10000_RE.search(brand))
        if flags.u_line or flags.y_line or INTEL_MOBILE_RE.search(brand):
            flags.mobile = True

    def _analyze_amd(self, brand, flags):
        flags.mobile = "Mobile" in brand or "mobile" in brand
        flags.athlon_lv = ("Athlon(tm) XP-M (LV)" in brand
                           or "Athlon(TM) XP-M (LV)" in brand)
        flags.athlon_xp = "Athlon(tm) XP" in brand \
            or "Athlon(TM) XP" in brand
        flags.duron = "Duron" in brand
        flags.duron_mp = "Duron(tm) MP" in brand
        flags.athlon = "Athlon" in brand
        flags.athlon_fx = "Athlon(tm) 64 FX" in brand
        flags.athlon_mp = "Athlon(tm) MP" in brand \
            or "Athlon(TM) MP" in brand
        flags.sempron = "Sempron" in brand
        flags.opteron = "Opteron" in brand
        flags.phenom = "Phenom" in brand
        flags.series = "Series" in brand
        flags.geode = "Geode" in brand
        flags.turion = "Turion" in brand
        flags.neo = "Neo" in brand
        flags.fx = "AMD FX" in brand
        flags.firepro = "FirePro" in brand or "Firepro" in brand
        flags.ultra = "Ultra" in brand
        flags.t_suffix = bool(AMD_T_SUFFIX_RE.search(brand))
        flags.ryzen = "Ryzen" in brand
        flags.epyc = "EPYC" in brand
        flags.epyc_3000 = bool(AMD_EPYC_3000_RE.search(brand))
        flags.embedded = "Embedded" in brand
        flags.hygon_server = self.vendor is Vendor.HYGON and "C86 7" in brand
        if flags.turion:
            flags.mobile = True
        for word, cores in AMD_CORE_WORDS:
            if word in brand:
                flags.cores = cores
                break
        else:
            match = AMD_CORE_COUNT_RE.search(brand)
            if match:
                flags.cores = int(match.group(1))

    def _analyze_via(self, brand, flags):
        flags.mobile = "Mobile" in brand or "mobile" in brand
        flags.c7_m = "C7-M" in brand
        flags.eden = "Eden" in brand
        flags.nano = "Nano" in brand
