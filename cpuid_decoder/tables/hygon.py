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
:mod:`cpuid_decoder.tables.hygon` -- Hygon model names
======================================================

Hygon parts are licensed Zen derivatives and share AMD's family 0x18
numbering.
"""

from cpuid_decoder.predicates import hygon_server
from cpuid_decoder.rules import F, FM, FMQ, FMS, RuleTable


HYGON_RULES = [
    FMS(9, 15, 0, 0, 1, "Hygon C86 Dhyana (A1)"),
    FMS(9, 15, 0, 0, 2, "Hygon C86 Dhyana (A2)"),
    FM(9, 15, 0, 0, "Hygon C86 Dhyana"),
    FMQ(9, 15, 0, 1, hygon_server, "Hygon C86 7100 (Dhyana)"),
    FM(9, 15, 0, 1, "Hygon Dhyana"),
    FMQ(9, 15, 0, 2, hygon_server, "Hygon C86 7200 (Dhyana Plus)"),
    FM(9, 15, 0, 2, "Hygon Dhyana Plus"),
    FMQ(9, 15, 0, 4, hygon_server, "Hygon C86 7300 (Dharma)"),
    FM(9, 15, 0, 4, "Hygon C86-3G (Dharma)"),
    FM(9, 15, 0, 6, "Hygon C86-4G"),
    FM(9, 15, 0, 7, "Hygon C86-5G"),
    F(9, 15, "Hygon (unknown model)"),
]

HYGON_TABLE = RuleTable("hygon", HYGON_RULES, default="unknown")
