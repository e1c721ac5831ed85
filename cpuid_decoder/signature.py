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
:mod:`cpuid_decoder.signature` -- processor signature keys
==========================================================

The signature is taken from EAX of leaf 1 (or leaf 0x80000001 for the few
vendors that identify themselves there)::

    [27:20] Extended Family
    [19:16] Extended Model
    [11:8]  Family
    [7:4]   Model
    [3:0]   Stepping
"""

from collections import namedtuple

from cpuid_decoder.lib.bit import bit_value


_SignatureKey = namedtuple(
    "SignatureKey",
    "extended_family family extended_model model stepping")


class SignatureKey(_SignatureKey):
    """
    Immutable identification key of one processor.

    Rule tables compare either the synthesized values (extended fields
    folded in) or, for legacy parts, the plain 4-bit family and model.
    """

    __slots__ = ()

    @classmethod
    def from_eax(cls, eax):
        return cls(
            extended_family=bit_value(eax, 20, 27),
            family=bit_value(eax, 8, 11),
            extended_model=bit_value(eax, 16, 19),
            model=bit_value(eax, 4, 7),
            stepping=bit_value(eax, 0, 3))

    @classmethod
    def from_fields(cls, xf, f, xm, m, s=0):
        return cls(xf, f, xm, m, s)

    @property
    def synth_family(self):
        return self.extended_family + self.family

    @property
    def synth_model(self):
        return (self.extended_model << 4) + self.model

    @property
    def family_view(self):
        return (self.synth_family,)

    @property
    def family_model_view(self):
        return (self.synth_family, self.synth_model)

    @property
    def family_model_stepping_view(self):
        return (self.synth_family, self.synth_model, self.stepping)

    @property
    def legacy_family_view(self):
        return (self.family,)

    @property
    def legacy_family_model_view(self):
        return (self.family, self.model)

    @property
    def legacy_family_model_stepping_view(self):
        return (self.family, self.model, self.stepping)

    def to_eax(self):
        return ((self.extended_family << 20) | (self.extended_model << 16)
                | (self.family << 8) | (self.model << 4) | self.stepping)

    def __str__(self):
        return "family {:#x}, model {:#x}, stepping {:#x}".format(
            self.synth_family, self.synth_model, self.stepping)
