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
:mod:`cpuid_decoder.vendor` -- vendor and hypervisor identification
===================================================================
"""

from enum import Enum

from cpuid_decoder.lib.bit import word_bytes


class Vendor(Enum):
    UNKNOWN = 0
    INTEL = 1
    AMD = 2
    CYRIX = 3
    VIA = 4
    TRANSMETA = 5
    UMC = 6
    NEXGEN = 7
    RISE = 8
    SIS = 9
    NSC = 10
    VORTEX = 11
    RDC = 12
    HYGON = 13
    ZHAOXIN = 14


VENDOR_STRINGS = {
    "GenuineIntel": Vendor.INTEL,
    "AuthenticAMD": Vendor.AMD,
    "AMDisbetter!": Vendor.AMD,
    "CyrixInstead": Vendor.CYRIX,
    "CentaurHauls": Vendor.VIA,
    "UMC UMC UMC ": Vendor.UMC,
    "NexGenDriven": Vendor.NEXGEN,
    "RiseRiseRise": Vendor.RISE,
    "GenuineTMx86": Vendor.TRANSMETA,
    "TransmetaCPU": Vendor.TRANSMETA,
    "SiS SiS SiS ": Vendor.SIS,
    "Geode by NSC": Vendor.NSC,
    "Vortex86 SoC": Vendor.VORTEX,
    "Genuine  RDC": Vendor.RDC,
    "HygonGenuine": Vendor.HYGON,
    "  Shanghai  ": Vendor.ZHAOXIN,
}

VENDOR_NAMES = {
    Vendor.INTEL: "Intel",
    Vendor.AMD: "AMD",
    Vendor.CYRIX: "Cyrix",
    Vendor.VIA: "VIA",
    Vendor.TRANSMETA: "Transmeta",
    Vendor.UMC: "UMC",
    Vendor.NEXGEN: "NexGen",
    Vendor.RISE: "Rise",
    Vendor.SIS: "SiS",
    Vendor.NSC: "NSC",
    Vendor.VORTEX: "Vortex",
    Vendor.RDC: "RDC",
    Vendor.HYGON: "Hygon",
    Vendor.ZHAOXIN: "Zhaoxin",
}

HYPERVISOR_NAMES = {
    "VMwareVMware": "VMware",
    "KVMKVMKVM": "KVM",
    "Linux KVM Hv": "KVM with Hyper-V enlightenments",
    "Microsoft Hv": "Microsoft Hyper-V",
    "XenVMMXenVMM": "Xen",
    "prl hyperv": "Parallels",
    " lrpepyh vr": "Parallels (alternate)",
    "TCGTCGTCGTCG": "QEMU TCG",
    "bhyve bhyve": "bhyve",
    "ACRNACRNACRN": "ACRN",
    "QNXQVMBSQG": "QNX Hypervisor",
    "VBoxVBoxVBox": "VirtualBox",
    "Apple VZ": "Apple Virtualization",
}


def vendor_string(ebx, ecx, edx):
    """
    Assemble the 12 character vendor string of leaf 0.

    The registers are concatenated in EBX, EDX, ECX order.
    """
    return word_bytes(ebx, edx, ecx).decode("latin-1")


def vendor_from_string(string):
    return VENDOR_STRINGS.get(string, Vendor.UNKNOWN)


def vendor_name(vendor):
    """
    Display name of ``vendor`` or ``None`` for unknown vendors.
    """
    return VENDOR_NAMES.get(vendor)


def hypervisor_string(ebx, ecx, edx):
    """
    Assemble the hypervisor signature of leaf 0x40000000.

    Unlike leaf 0 the registers are in EBX, ECX, EDX order.
    """
    raw = word_bytes(ebx, ecx, edx).decode("latin-1")
    return raw.split("\x00", 1)[0]


def hypervisor_name(string):
    if not string:
        return None
    return HYPERVISOR_NAMES.get(string, HYPERVISOR_NAMES.get(
        string.rstrip(), string))
