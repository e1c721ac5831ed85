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
:mod:`cpuid_decoder.topology` -- cores, threads and APIC ID widths
==================================================================

Each vendor has a list of methods, from the most precise to the least
precise. The first method whose leaves are present decides everything;
methods are never blended.

Intel: leaf 0x1f, leaf 0xb, leaf 4 with leaf 1, leaf 1 alone.
AMD and Hygon: leaf 0x8000001e (family 0x17 and later), leaf 0x80000008
with leaf 1, leaf 1 alone.
"""

from collections import namedtuple
import logging

from cpuid_decoder.lib.bit import bit_value, ceil_log2, test_bit
from cpuid_decoder.vendor import Vendor, vendor_name


logger = logging.getLogger(__name__)

# Level types of leaves 0xb and 0x1f, ECX[15:8]
LEVEL_SMT = 1
LEVEL_CORE = 2

# Leaf 1 EDX: the logical processor count in EBX[23:16] is valid
HTT_BIT = 28
# Leaf 0x80000001 ECX: cores are reported as logical processors
CMP_LEGACY_BIT = 1

MpInfo = namedtuple("MpInfo", "method cores hyperthreads")
MpInfo.__doc__ = """
Multiprocessing summary of one package.

``method`` is ``None`` when no method applied, in which case the package
is reported as one core with one thread. ``hyperthreads`` is the number
of threads per core.
"""

ApicWidths = namedtuple("ApicWidths", "smt core compute_unit package")
ApicWidths.__doc__ = """
Bit widths of the APIC ID fields. ``package`` is the bit where the
package ID starts; ``compute_unit`` is ``None`` on parts without compute
units.
"""

NO_MP = MpInfo(None, 1, 1)


class TopologyResolver:
    """
    Resolve the topology of a stash whose raw leaves were scanned.
    """

    def __init__(self, stash):
        self.stash = stash

    def resolve(self):
        """
        Return ``(MpInfo, ApicWidths or None)``.
        """
        vendor = self.stash.vendor
        if vendor is Vendor.INTEL:
            methods = (self._intel_leaf_1f, self._intel_leaf_b,
                       self._intel_leaf_4, self._leaf_1)
        elif vendor in (Vendor.AMD, Vendor.HYGON):
            methods = (self._amd_leaf_8000001e, self._amd_leaf_80000008,
                       self._leaf_1)
        else:
            methods = (self._leaf_1,)
        for method in methods:
            result = method()
            if result is not None:
                logger.debug("topology resolved by %s: %r", result[0].method,
                             result)
                return result
        logger.debug("no topology method applies")
        return NO_MP, None

    def _prefix(self):
        return vendor_name(self.stash.vendor) or "generic"

    def _htt(self):
        return self.stash.saw_1 and test_bit(HTT_BIT, self.stash.val_1_edx)

    def _logical_count(self):
        # Leaf 1 EBX[23:16], only meaningful with HTT set
        if not self._htt():
            return 1
        return max(bit_value(self.stash.val_1_ebx, 16, 23), 1)

    def _levels(self, levels, method):
        smt = core = None
        top_shift = 0
        for regs in levels:
            level_type = bit_value(regs.ecx, 8, 15)
            count = bit_value(regs.ebx, 0, 15)
            shift = bit_value(regs.eax, 0, 4)
            top_shift = max(top_shift, shift)
            if level_type == LEVEL_SMT:
                smt = (count, shift)
            elif level_type == LEVEL_CORE:
                core = (count, shift)
        if smt is None or core is None or not smt[0] or not core[0]:
            return None
        threads, smt_shift = smt
        total, core_shift = core
        cores = max(total // threads, 1)
        widths = ApicWidths(smt=smt_shift, core=core_shift - smt_shift,
                            compute_unit=None, package=top_shift)
        return MpInfo(method, cores, threads), widths

    def _intel_leaf_1f(self):
        if not self.stash.saw_1f:
            return None
        return self._levels(self.stash.val_1f_levels, "Intel leaf 0x1f")

    def _intel_leaf_b(self):
        if not self.stash.saw_b:
            return None
        return self._levels(self.stash.val_b_levels, "Intel leaf 0xb")

    def _intel_leaf_4(self):
        if not (self.stash.saw_1 and self.stash.saw_4):
            return None
        cores = bit_value(self.stash.val_4_eax, 26, 31) + 1
        logical = max(self._logical_count(), cores)
        core_width = ceil_log2(cores)
        smt_width = max(ceil_log2(logical) - core_width, 0)
        widths = ApicWidths(smt=smt_width, core=core_width,
                            compute_unit=None,
                            package=smt_width + core_width)
        return MpInfo("Intel leaf 1/4", cores, logical // cores), widths

    def _leaf_1(self):
        if not self._htt():
            return None
        logical = self._logical_count()
        width = ceil_log2(logical)
        widths = ApicWidths(smt=width, core=0, compute_unit=None,
                            package=width)
        return MpInfo("{} leaf 1".format(self._prefix()), 1,
                      logical), widths

    def _amd_cores(self):
        # Leaf 0x80000008 ECX: NC in [7:0], ApicIdCoreIdSize in [15:12]
        ecx = self.stash.val_80000008_ecx
        size = bit_value(ecx, 12, 15)
        nc = bit_value(ecx, 0, 7)
        if size:
            return (nc & ((1 << size) - 1)) + 1, size
        return nc + 1, ceil_log2(nc + 1)

    def _amd_leaf_8000001e(self):
        stash = self.stash
        if stash.key.synth_family < 0x17 or not self._htt() \
                or not stash.saw_8000001e or not stash.saw_80000008:
            return None
        threads = bit_value(stash.val_8000001e_ebx, 8, 15) + 1
        total, core_width = self._amd_cores()
        cores = max(total // threads, 1)
        smt_width = ceil_log2(threads)
        widths = ApicWidths(smt=smt_width,
                            core=max(core_width - smt_width, 0),
                            compute_unit=None, package=core_width)
        return MpInfo("{} leaf 0x8000001e".format(self._prefix()),
                      cores, threads), widths

    def _amd_leaf_80000008(self):
        stash = self.stash
        if not self._htt() or not stash.saw_80000008:
            return None
        logical = self._logical_count()
        cores, core_width = self._amd_cores()
        method = "{} leaf 1/0x80000008".format(self._prefix())
        if stash.saw_80000001 \
                and test_bit(CMP_LEGACY_BIT, stash.val_80000001_ecx):
            mp = MpInfo(method, logical, 1)
        else:
            mp = MpInfo(method, cores, max(logical // cores, 1))
        compute_unit = None
        if stash.key.synth_family == 0x15 and stash.saw_8000001e:
            # Bulldozer compute units pair two cores
            compute_unit = ceil_log2(
                bit_value(stash.val_8000001e_ebx, 8, 15) + 1)
        smt_width = ceil_log2(mp.hyperthreads)
        widths = ApicWidths(smt=smt_width, core=core_width,
                            compute_unit=compute_unit,
                            package=smt_width + core_width)
        return mp, widths
