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
:mod:`cpuid_decoder.stash` -- per-CPU decoding context
======================================================

A :class:`Stash` holds everything the rule tables and predicates look at
for one CPU. It is put together by :class:`StashBuilder` in three stages,
each stage only reading what the previous ones produced:

1. raw leaves (vendor, signature, cache geometry, brand string, the
   registers the tables and topology need);
2. brand analysis (including the AMD override brand);
3. topology.

Once built, the stash is frozen and can be handed to any number of
lookups.
"""

import logging

from cpuid_decoder.brand import (
    BrandFlags,
    BrandStringAnalyzer,
    clean_brand,
    intel_brand_index_string,
)
from cpuid_decoder.cache import (
    CacheFlags,
    scan_leaf2,
    scan_leaf_80000006,
)
from cpuid_decoder.lib.bit import bit_value, word_bytes
from cpuid_decoder.lib.frozen import Freezable
from cpuid_decoder.signature import SignatureKey
from cpuid_decoder.topology import TopologyResolver
from cpuid_decoder.vendor import (
    Vendor,
    hypervisor_string,
    vendor_from_string,
    vendor_string,
)


logger = logging.getLogger(__name__)

BASIC_BASE = 0x00000000
HYPERVISOR_BASE = 0x40000000
EXTENDED_BASE = 0x80000000


class Stash(Freezable):
    """
    Decoding context of one CPU.

    Register words of leaves that were not present read as 0 and their
    ``saw_*`` flag is ``False``. Freezing the stash also freezes its brand
    and cache flags.
    """

    def __init__(self):
        self.vendor = Vendor.UNKNOWN
        self.hypervisor = ""
        self.key = SignatureKey.from_eax(0)
        self.val_0_eax = 0
        self.val_1_eax = 0
        self.val_1_ebx = 0
        self.val_1_ecx = 0
        self.val_1_edx = 0
        self.saw_1 = False
        self.val_4_eax = 0
        self.saw_4 = False
        self.val_b_levels = ()
        self.saw_b = False
        self.val_1f_levels = ()
        self.saw_1f = False
        self.val_80000000_eax = 0
        self.val_80000001_eax = 0
        self.val_80000001_ebx = 0
        self.val_80000001_ecx = 0
        self.val_80000001_edx = 0
        self.saw_80000001 = False
        self.val_80000008_ecx = 0
        self.saw_80000008 = False
        self.val_8000001e_ebx = 0
        self.saw_8000001e = False
        self.brand = ""
        self.override_brand = ""
        self.br = BrandFlags()
        self.cache = CacheFlags()
        self.mp = None
        self.widths = None

    def freeze(self):
        self.br.freeze()
        self.cache.freeze()
        super().freeze()

    @property
    def effective_brand(self):
        """
        The brand shown to the user: the override brand when one was
        synthesized, the OEM brand string otherwise.
        """
        return self.override_brand or self.brand

    def __repr__(self):
        return "<Stash {} {} {!r}>".format(
            self.vendor.name, self.key, self.effective_brand)


class StashBuilder:
    """
    Build a frozen :class:`Stash` from a
    :class:`~cpuid_decoder.leaves.LeafDump`.
    """

    def __init__(self, leaf_dump):
        self.leaf_dump = leaf_dump
        self._max_basic = self._max_leaf(BASIC_BASE)
        self._max_extended = self._max_leaf(EXTENDED_BASE)

    def build(self):
        stash = Stash()
        self.scan_leaves(stash)
        self.analyze_brand(stash)
        self.resolve_topology(stash)
        stash.freeze()
        logger.debug("built %r", stash)
        return stash

    def _max_leaf(self, base):
        regs = self.leaf_dump.get(base)
        if regs is None:
            return None
        if base and not base <= regs.eax <= base + 0xffff:
            # Parts without extended leaves return garbage here
            return base - 1
        return regs.eax

    def leaf(self, leaf, subleaf=0):
        """
        Registers of ``leaf`` if it is present, ``None`` otherwise.

        A leaf is present when the dump holds it and it does not lie
        beyond the highest leaf of its range reported by the CPU.
        """
        if leaf >= EXTENDED_BASE:
            limit = self._max_extended
        elif leaf >= HYPERVISOR_BASE:
            limit = None
        else:
            limit = self._max_basic
        if limit is not None and leaf > limit:
            return None
        return self.leaf_dump.get(leaf, subleaf)

    def scan_leaves(self, stash):
        regs = self.leaf(0)
        if regs is not None:
            stash.val_0_eax = regs.eax
            stash.vendor = vendor_from_string(
                vendor_string(regs.ebx, regs.ecx, regs.edx))
        regs = self.leaf(1)
        if regs is not None:
            stash.val_1_eax, stash.val_1_ebx, stash.val_1_ecx, \
                stash.val_1_edx = regs
            stash.saw_1 = True
        regs = self.leaf(4)
        if regs is not None:
            stash.val_4_eax = regs.eax
            stash.saw_4 = True
        stash.val_b_levels = self._topology_levels(0xb)
        stash.saw_b = bool(stash.val_b_levels)
        stash.val_1f_levels = self._topology_levels(0x1f)
        stash.saw_1f = bool(stash.val_1f_levels)
        regs = self.leaf(HYPERVISOR_BASE)
        if regs is not None:
            stash.hypervisor = hypervisor_string(regs.ebx, regs.ecx, regs.edx)
        regs = self.leaf(EXTENDED_BASE)
        if regs is not None:
            stash.val_80000000_eax = regs.eax
        regs = self.leaf(0x80000001)
        if regs is not None:
            stash.val_80000001_eax, stash.val_80000001_ebx, \
                stash.val_80000001_ecx, stash.val_80000001_edx = regs
            stash.saw_80000001 = True
        stash.brand = self._brand_string()
        regs = self.leaf(0x80000008)
        if regs is not None:
            stash.val_80000008_ecx = regs.ecx
            stash.saw_80000008 = True
        regs = self.leaf(0x8000001e)
        if regs is not None:
            stash.val_8000001e_ebx = regs.ebx
            stash.saw_8000001e = True
        stash.key = self._signature(stash)
        self._scan_caches(stash)

    def _topology_levels(self, leaf):
        # Enumeration ends at the first subleaf whose level type is 0
        levels = []
        subleaf = 0
        while True:
            regs = self.leaf(leaf, subleaf)
            if regs is None or bit_value(regs.ecx, 8, 15) == 0:
                break
            levels.append(regs)
            subleaf += 1
        return tuple(levels)

    def _brand_string(self):
        words = []
        for leaf in (0x80000002, 0x80000003, 0x80000004):
            regs = self.leaf(leaf)
            if regs is None:
                return ""
            words.extend(regs)
        return clean_brand(word_bytes(*words).decode("latin-1"))

    def _signature(self, stash):
        if stash.vendor is Vendor.TRANSMETA and stash.saw_80000001:
            return SignatureKey.from_eax(stash.val_80000001_eax)
        return SignatureKey.from_eax(stash.val_1_eax)

    def _scan_caches(self, stash):
        key = stash.key
        xeon_mp_l3 = (stash.vendor is Vendor.INTEL
                      and key.synth_family == 0xf and key.synth_model == 6)
        subleaf = 0
        while True:
            regs = self.leaf(2, subleaf)
            if regs is None:
                break
            scan_leaf2(stash.cache, regs, xeon_mp_l3)
            subleaf += 1
        regs = self.leaf(0x80000006)
        if regs is not None and stash.vendor is not Vendor.INTEL:
            scan_leaf_80000006(stash.cache, regs)

    def analyze_brand(self, stash):
        analyzer = BrandStringAnalyzer(stash.vendor)
        stash.override_brand = analyzer.override_brand(stash)
        brand = stash.effective_brand
        if not brand and stash.vendor is Vendor.INTEL:
            brand = intel_brand_index_string(
                bit_value(stash.val_1_ebx, 0, 7), stash.val_1_eax)
            if brand:
                logger.debug("Intel brand index gives %r", brand)
        stash.br = analyzer.analyze(brand)

    def resolve_topology(self, stash):
        stash.mp, stash.widths = TopologyResolver(stash).resolve()


def build_stash(leaf_dump):
    """
    Shorthand for ``StashBuilder(leaf_dump).build()``.
    """
    return StashBuilder(leaf_dump).build()
