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
cpuid_decoder.tests.test_rules
==============================

Tests for cpuid_decoder.rules module
"""

import unittest

from cpuid_decoder.predicates import Predicate
from cpuid_decoder.rules import (
    Arch,
    F,
    FM,
    FMQ,
    FMS,
    FMSQ,
    FQ,
    MatchKind,
    NO_ARCH,
    RuleTable,
    TF,
    TFM,
    TFMS,
    match,
)
from cpuid_decoder.signature import SignatureKey
from cpuid_decoder.stash import Stash


def flag(value):
    return Predicate("flag", lambda stash: value)


class FirstMatchTests(unittest.TestCase):

    def setUp(self):
        self.key = SignatureKey.from_eax(0x000306a9)
        self.stash = Stash()

    def table(self, predicate):
        return RuleTable("test", [
            FMSQ(0, 6, 3, 10, 9, predicate, "narrow"),
            FM(0, 6, 3, 10, "broad"),
        ], default="unknown")

    def test_narrow_rule_wins_when_predicate_holds(self):
        self.assertEqual(
            match(self.table(flag(True)), self.key, self.stash), "narrow")

    def test_broad_rule_wins_when_predicate_fails(self):
        self.assertEqual(
            match(self.table(flag(False)), self.key, self.stash), "broad")

    def test_declaration_order_beats_specificity(self):
        table = RuleTable("test", [
            F(0, 6, "family"),
            FMS(0, 6, 3, 10, 9, "stepping"),
        ], default="unknown")
        self.assertEqual(match(table, self.key, self.stash), "family")

    def test_default(self):
        table = RuleTable("test", [FM(0, 6, 2, 10, "Sandy Bridge")],
                          default="unknown")
        self.assertEqual(match(table, self.key, self.stash), "unknown")

    def test_empty_table_returns_default(self):
        self.assertIs(
            match(RuleTable("empty", [], NO_ARCH), self.key, self.stash),
            NO_ARCH)

    def test_callable_result(self):
        table = RuleTable("test", [
            FM(0, 6, 3, 10,
               lambda key, stash: "stepping {}".format(key.stepping)),
        ])
        self.assertEqual(match(table, self.key, self.stash), "stepping 9")

    def test_callable_default(self):
        table = RuleTable(
            "test", [], default=lambda key, stash: key.synth_family)
        self.assertEqual(match(table, self.key, self.stash), 6)

    def test_table_method(self):
        table = RuleTable("test", [FQ(0, 6, flag(True), "six")])
        self.assertEqual(table.match(self.key, self.stash), "six")
        self.assertEqual(len(table), 1)


class MatchKindTests(unittest.TestCase):

    def test_synthesized_fields(self):
        key = SignatureKey.from_eax(0x00870f10)
        self.assertEqual(FM(8, 15, 7, 1, "x").fields, (0x17, 0x71))
        self.assertTrue(FM(8, 15, 7, 1, "x").matches(key, Stash()))
        # Same synthesized family through another split of the fields
        self.assertTrue(F(0, 0x17, "x").matches(key, Stash()))

    def test_legacy_fields_ignore_extensions(self):
        key = SignatureKey.from_eax(0x00870f10)
        self.assertTrue(TF(15, "x").matches(key, Stash()))
        self.assertTrue(TFM(15, 1, "x").matches(key, Stash()))
        self.assertFalse(TFMS(15, 1, 1, "x").matches(key, Stash()))

    def test_view(self):
        key = SignatureKey.from_eax(0x000306a9)
        self.assertEqual(MatchKind.FAMILY_MODEL.view(key), (6, 0x3a))
        self.assertEqual(MatchKind.LEGACY_FAMILY_MODEL.view(key), (6, 0xa))

    def test_predicate_only_checked_after_fields(self):
        calls = []

        def record(stash):
            calls.append(stash)
            return True

        rule = FMQ(0, 6, 3, 10, Predicate("record", record), "x")
        rule.matches(SignatureKey.from_eax(0x000206a7), Stash())
        self.assertEqual(calls, [])


class ArchTests(unittest.TestCase):

    def test_empty_arch_is_false(self):
        self.assertFalse(NO_ARCH)
        self.assertFalse(Arch())
        self.assertFalse(Arch(core_is_uarch=True))

    def test_partial_arch_is_true(self):
        self.assertTrue(Arch(phys="65nm"))
        self.assertTrue(Arch("K8"))

    def test_defaults(self):
        self.assertEqual(Arch("Zen 2", "Zen", "7nm"),
                         ("Zen 2", "Zen", "7nm", False))
