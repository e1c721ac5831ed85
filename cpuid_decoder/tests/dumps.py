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
Build :class:`~cpuid_decoder.leaves.LeafDump` objects for tests from
readable values instead of raw register words.
"""

from cpuid_decoder.leaves import LeafDump

EXTENDED_BASE = 0x80000000

INTEL = "GenuineIntel"
AMD = "AuthenticAMD"
HYGON = "HygonGenuine"


def text_words(text, count):
    """
    Pack ``text`` into ``count`` little-endian register words, padding
    with NULs.
    """
    raw = text.encode("latin-1").ljust(count * 4, b"\x00")
    return [int.from_bytes(raw[i:i + 4], "little")
            for i in range(0, count * 4, 4)]


def make_leaf_dump(vendor, eax1, ebx1=0, ecx1=0, edx1=0, brand=None,
                   max_basic=1, leaves=None, hypervisor=None):
    """
    Assemble a dump with leaf 0, leaf 1 and optionally a brand string.

    :param leaves:
        extra ``{(leaf, subleaf): (eax, ebx, ecx, edx)}`` entries; the
        highest extended leaf among them and the brand string leaves sets
        EAX of leaf 0x80000000
    """
    ebx, edx, ecx = text_words(vendor, 3)
    values = {
        (0, 0): (max_basic, ebx, ecx, edx),
        (1, 0): (eax1, ebx1, ecx1, edx1),
    }
    if brand is not None:
        words = text_words(brand, 12)
        for i, leaf in enumerate((0x80000002, 0x80000003, 0x80000004)):
            values[(leaf, 0)] = tuple(words[i * 4:i * 4 + 4])
    if hypervisor is not None:
        ebx, ecx, edx = text_words(hypervisor, 3)
        values[(0x40000000, 0)] = (0x40000001, ebx, ecx, edx)
    values.update(leaves or {})
    extended = [leaf for leaf, _ in values if leaf > EXTENDED_BASE]
    if extended and (EXTENDED_BASE, 0) not in values:
        values[(EXTENDED_BASE, 0)] = (max(extended), 0, 0, 0)
    return LeafDump(values)
