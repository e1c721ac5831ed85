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
:mod:`cpuid_decoder.leaves` -- in-memory snapshot of CPUID leaves
=================================================================
"""

from collections import OrderedDict, namedtuple


Registers = namedtuple("Registers", "eax ebx ecx edx")


class LeafDump:
    """
    Register values of every (leaf, subleaf) queried on one CPU.

    This is the whole contract between an acquisition layer (a replayed
    dump, a kernel device or the instruction itself) and the engine.
    """

    def __init__(self, values=None):
        self._values = OrderedDict()
        if values:
            for (leaf, subleaf), regs in values.items():
                self.add(leaf, subleaf, *regs)

    def add(self, leaf, subleaf, eax, ebx, ecx, edx):
        self._values[(leaf, subleaf)] = Registers(eax, ebx, ecx, edx)

    def get(self, leaf, subleaf=0):
        """
        Registers of ``leaf``/``subleaf`` or ``None`` if it was not queried.
        """
        return self._values.get((leaf, subleaf))

    def __len__(self):
        return len(self._values)

    def as_json(self):
        """
        The registers keyed by ``"0xLLLLLLLL/0xSS"`` strings.
        """
        return {
            "{:#010x}/{:#04x}".format(leaf, subleaf): dict(regs._asdict())
            for (leaf, subleaf), regs in self._values.items()}

    def __repr__(self):
        return "<LeafDump with {} leaves>".format(len(self._values))
