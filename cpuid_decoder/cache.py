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
:mod:`cpuid_decoder.cache` -- cache geometry observations
=========================================================

Only the cache descriptors of leaf 2 are decoded here (TLB and prefetch
descriptors carry nothing the rule tables need), together with the L2/L3
geometry of leaf 0x80000006.
"""

from collections import namedtuple
import logging

from cpuid_decoder.lib.bit import bit_value
from cpuid_decoder.lib.frozen import Freezable


logger = logging.getLogger(__name__)


CacheDescriptor = namedtuple("CacheDescriptor", "level size_kb ways line")

# Intel SDM Vol. 2A, "Encoding of CPUID Leaf 2 Descriptors"
CACHE_DESCRIPTORS = {
    0x06: CacheDescriptor(1, 8, 4, 32),
    0x08: CacheDescriptor(1, 16, 4, 32),
    0x09: CacheDescriptor(1, 32, 4, 64),
    0x0a: CacheDescriptor(1, 8, 2, 32),
    0x0c: CacheDescriptor(1, 16, 4, 32),
    0x0d: CacheDescriptor(1, 16, 4, 64),
    0x0e: CacheDescriptor(1, 24, 6, 64),
    0x10: CacheDescriptor(1, 16, 4, 32),
    0x15: CacheDescriptor(1, 16, 4, 32),
    0x1a: CacheDescriptor(2, 96, 6, 64),
    0x1d: CacheDescriptor(2, 128, 2, 64),
    0x21: CacheDescriptor(2, 256, 8, 64),
    0x22: CacheDescriptor(3, 512, 4, 64),
    0x23: CacheDescriptor(3, 1024, 8, 64),
    0x24: CacheDescriptor(2, 1024, 16, 64),
    0x25: CacheDescriptor(3, 2048, 8, 64),
    0x29: CacheDescriptor(3, 4096, 8, 64),
    0x2c: CacheDescriptor(1, 32, 8, 64),
    0x30: CacheDescriptor(1, 32, 8, 64),
    0x39: CacheDescriptor(2, 128, 4, 64),
    0x3a: CacheDescriptor(2, 192, 6, 64),
    0x3b: CacheDescriptor(2, 128, 2, 64),
    0x3c: CacheDescriptor(2, 256, 4, 64),
    0x3d: CacheDescriptor(2, 384, 6, 64),
    0x3e: CacheDescriptor(2, 512, 4, 64),
    0x41: CacheDescriptor(2, 128, 4, 32),
    0x42: CacheDescriptor(2, 256, 4, 32),
    0x43: CacheDescriptor(2, 512, 4, 32),
    0x44: CacheDescriptor(2, 1024, 4, 32),
    0x45: CacheDescriptor(2, 2048, 4, 32),
    0x46: CacheDescriptor(3, 4096, 4, 64),
    0x47: CacheDescriptor(3, 8192, 8, 64),
    0x48: CacheDescriptor(2, 3072, 12, 64),
    0x49: CacheDescriptor(2, 4096, 16, 64),
    0x4a: CacheDescriptor(3, 6144, 12, 64),
    0x4b: CacheDescriptor(3, 8192, 16, 64),
    0x4c: CacheDescriptor(3, 12288, 12, 64),
    0x4d: CacheDescriptor(3, 16384, 16, 64),
    0x4e: CacheDescriptor(2, 6144, 24, 64),
    0x60: CacheDescriptor(1, 16, 8, 64),
    0x66: CacheDescriptor(1, 8, 4, 64),
    0x67: CacheDescriptor(1, 16, 4, 64),
    0x68: CacheDescriptor(1, 32, 4, 64),
    0x78: CacheDescriptor(2, 1024, 4, 64),
    0x79: CacheDescriptor(2, 128, 8, 64),
    0x7a: CacheDescriptor(2, 256, 8, 64),
    0x7b: CacheDescriptor(2, 512, 8, 64),
    0x7c: CacheDescriptor(2, 1024, 8, 64),
    0x7d: CacheDescriptor(2, 2048, 8, 64),
    0x7f: CacheDescriptor(2, 512, 2, 64),
    0x80: CacheDescriptor(2, 512, 8, 64),
    0x82: CacheDescriptor(2, 256, 8, 32),
    0x83: CacheDescriptor(2, 512, 8, 32),
    0x84: CacheDescriptor(2, 1024, 8, 32),
    0x85: CacheDescriptor(2, 2048, 8, 32),
    0x86: CacheDescriptor(2, 512, 4, 64),
    0x87: CacheDescriptor(2, 1024, 8, 64),
    0xd0: CacheDescriptor(3, 512, 4, 64),
    0xd1: CacheDescriptor(3, 1024, 4, 64),
    0xd2: CacheDescriptor(3, 2048, 4, 64),
    0xd6: CacheDescriptor(3, 1024, 8, 64),
    0xd7: CacheDescriptor(3, 2048, 8, 64),
    0xd8: CacheDescriptor(3, 4096, 8, 64),
    0xdc: CacheDescriptor(3, 1536, 12, 64),
    0xdd: CacheDescriptor(3, 3072, 12, 64),
    0xde: CacheDescriptor(3, 6144, 12, 64),
    0xe2: CacheDescriptor(3, 2048, 16, 64),
    0xe3: CacheDescriptor(3, 4096, 16, 64),
    0xe4: CacheDescriptor(3, 8192, 16, 64),
    0xea: CacheDescriptor(3, 12288, 24, 64),
    0xeb: CacheDescriptor(3, 18432, 24, 64),
    0xec: CacheDescriptor(3, 24576, 24, 64),
}

# Descriptor 0x49 is an L3 on the Xeon MP (family 0xf, model 6) and an L2
# everywhere else.
XEON_MP_L3_DESCRIPTOR = 0x49


class CacheFlags(Freezable):
    """
    Cache geometry booleans consulted by the rule tables.

    Every flag starts out ``False`` so that a CPU whose leaf 2 or leaf
    0x80000006 was never queried simply matches no cache-qualified rule.
    """

    FLAGS = (
        "l2_4w_256k", "l2_4w_512k", "l2_4w_1m_or_2m",
        "l2_8w_256k", "l2_8w_512k", "l2_8w_1m_or_2m",
        "l2_256k", "l2_512k", "l2_2m", "l2_6m", "l3",
    )

    def __init__(self):
        for flag in self.FLAGS:
            setattr(self, flag, False)
        self.l2_size_kb = 0
        self.l3_size_kb = 0

    def note(self, desc):
        """
        Record one observed cache.
        """
        if desc.level == 3:
            self.l3 = True
            self.l3_size_kb = max(self.l3_size_kb, desc.size_kb)
            return
        if desc.level != 2:
            return
        size = desc.size_kb
        self.l2_size_kb = max(self.l2_size_kb, size)
        if size == 256:
            self.l2_256k = True
        elif size == 512:
            self.l2_512k = True
        elif size == 2048:
            self.l2_2m = True
        elif size == 6144:
            self.l2_6m = True
        if desc.ways == 4:
            if size == 256:
                self.l2_4w_256k = True
            elif size == 512:
                self.l2_4w_512k = True
            elif size in (1024, 2048):
                self.l2_4w_1m_or_2m = True
        elif desc.ways == 8:
            if size == 256:
                self.l2_8w_256k = True
            elif size == 512:
                self.l2_8w_512k = True
            elif size in (1024, 2048):
                self.l2_8w_1m_or_2m = True

    def __repr__(self):
        set_flags = [flag for flag in self.FLAGS if getattr(self, flag)]
        return "<CacheFlags {} L2={}K>".format(
            " ".join(set_flags) or "-", self.l2_size_kb)


def leaf2_descriptors(regs):
    """
    Yield the descriptor bytes of one leaf 2 register set.

    The low byte of EAX is the iteration count, and a register whose bit
    31 is set carries no descriptors.
    """
    for index, word in enumerate(regs):
        if word & 0x80000000:
            continue
        for shift in (0, 8, 16, 24):
            if index == 0 and shift == 0:
                continue
            byte = (word >> shift) & 0xff
            if byte:
                yield byte


def scan_leaf2(flags, regs, xeon_mp_l3=False):
    """
    Accumulate the cache descriptors of leaf 2 into ``flags``.
    """
    for byte in leaf2_descriptors(regs):
        desc = CACHE_DESCRIPTORS.get(byte)
        if desc is None:
            continue
        if byte == XEON_MP_L3_DESCRIPTOR and xeon_mp_l3:
            desc = CacheDescriptor(3, desc.size_kb, desc.ways, desc.line)
        logger.debug("leaf 2 descriptor %#04x: %r", byte, desc)
        flags.note(desc)


# Associativity encoding of leaf 0x80000006 ECX[15:12]
AMD_L2_ASSOCIATIVITY = {
    0x0: 0, 0x1: 1, 0x2: 2, 0x4: 4, 0x6: 8, 0x8: 16,
    0xa: 32, 0xb: 48, 0xc: 64, 0xd: 96, 0xe: 128, 0xf: 255,
}


def scan_leaf_80000006(flags, regs):
    """
    Accumulate the L2 and L3 geometry reported by leaf 0x80000006.
    """
    size_kb = bit_value(regs.ecx, 16, 31)
    if size_kb:
        ways = AMD_L2_ASSOCIATIVITY.get(bit_value(regs.ecx, 12, 15), 0)
        flags.note(CacheDescriptor(2, size_kb, ways,
                                   bit_value(regs.ecx, 0, 7)))
    l3_size_kb = bit_value(regs.edx, 18, 31) * 512
    if l3_size_kb:
        flags.note(CacheDescriptor(3, l3_size_kb,
                                   bit_value(regs.edx, 12, 15),
                                   bit_value(regs.edx, 0, 7)))
