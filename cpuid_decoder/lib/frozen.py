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
:mod:`cpuid_decoder.lib.frozen` -- write-once objects
=====================================================
"""


class Freezable:
    """
    Mixin for objects that are filled in once and then only read.

    After :meth:`freeze` any attribute assignment raises
    :class:`AttributeError`.
    """

    _frozen = False

    def __setattr__(self, name, value):
        if self._frozen:
            raise AttributeError("cannot set {!r}: {} is frozen".format(
                name, type(self).__name__))
        object.__setattr__(self, name, value)

    def freeze(self):
        object.__setattr__(self, "_frozen", True)

    @property
    def frozen(self):
        return self._frozen
