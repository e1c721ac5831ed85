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
:mod:`cpuid_decoder.rules` -- rule tables and the match engine
==============================================================

A rule table is an ordered list of rules followed by a default. Each rule
names the signature fields it compares (family, family+model or
family+model+stepping, either synthesized or using the legacy 4-bit
fields), an optional predicate over the stash and a result.

Matching is first-match: rules are tried in declaration order and the
first one whose fields (and predicate) match wins, even when a later rule
would match too. Tables are therefore written from the most qualified
rules to the broadest ones, and the default makes every table total.

The helpers at the bottom of this module build rules in the shape the
vendor manuals use, ``(extended family, family, extended model, model,
stepping)``::

    FMS(0, 6, 3, 10, 9, "Intel Core (Ivy Bridge E1)")
    FMQ(0, 6, 3, 10, intel_xeon, "Intel Xeon E3-1200 v2 (Ivy Bridge)")
    FM(0, 6, 3, 10, "Intel Core (Ivy Bridge)")
"""

from collections import namedtuple
from enum import Enum
import logging


logger = logging.getLogger(__name__)


class MatchKind(Enum):
    FAMILY = ("family", False)
    FAMILY_MODEL = ("family_model", False)
    FAMILY_MODEL_STEPPING = ("family_model_stepping", False)
    LEGACY_FAMILY = ("family", True)
    LEGACY_FAMILY_MODEL = ("family_model", True)
    LEGACY_FAMILY_MODEL_STEPPING = ("family_model_stepping", True)

    def __init__(self, scope, legacy):
        self.scope = scope
        self.legacy = legacy

    def view(self, key):
        """
        The tuple of signature fields this kind compares.
        """
        prefix = "legacy_" if self.legacy else ""
        return getattr(key, "{}{}_view".format(prefix, self.scope))


class Arch(namedtuple("Arch", "uarch family phys core_is_uarch")):
    """
    Microarchitecture annotation produced by the uarch tables.

    :param uarch: microarchitecture name, e.g. ``"Ivy Bridge"``
    :param family: family label, e.g. ``"Sandy Bridge"``
    :param phys: process node or packaging, e.g. ``"22nm"``
    :param core_is_uarch:
        True when the core name given in the model text is the
        microarchitecture name, so it need not be repeated.
    """

    __slots__ = ()

    def __new__(cls, uarch=None, family=None, phys=None,
                core_is_uarch=False):
        return super(Arch, cls).__new__(
            cls, uarch, family, phys, core_is_uarch)

    def __bool__(self):
        return bool(self.uarch or self.family or self.phys)


NO_ARCH = Arch()


class Rule:
    """
    One entry of a rule table.

    :param kind: a :class:`MatchKind`
    :param fields: the values compared with ``kind.view(key)``
    :param result:
        the result, or a callable ``result(key, stash)`` producing it
    :param predicate:
        optional callable of the stash that must also be true
    """

    __slots__ = ("kind", "fields", "result", "predicate")

    def __init__(self, kind, fields, result, predicate=None):
        self.kind = kind
        self.fields = tuple(fields)
        self.result = result
        self.predicate = predicate

    def matches(self, key, stash):
        if self.kind.view(key) != self.fields:
            return False
        return self.predicate is None or self.predicate(stash)

    def resolve(self, key, stash):
        if callable(self.result):
            return self.result(key, stash)
        return self.result

    def __repr__(self):
        return "<Rule {} {} {}{!r}>".format(
            self.kind.name, "/".join("{:#x}".format(f) for f in self.fields),
            "{} ".format(self.predicate.name)
            if self.predicate is not None else "", self.result)


class RuleTable:
    """
    Ordered rules and a default.

    :param name: table name used in log messages
    :param rules: iterable of :class:`Rule`
    :param default: result (or callable) used when no rule matches
    """

    def __init__(self, name, rules, default=None):
        self.name = name
        self.rules = tuple(rules)
        self.default = default

    def match(self, key, stash):
        return match(self, key, stash)

    def __len__(self):
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def __repr__(self):
        return "<RuleTable {} ({} rules)>".format(self.name, len(self.rules))


def match(table, key, stash):
    """
    Evaluate ``table`` for ``key`` and return the first matching result.

    Rules are tried in declaration order; the table default is returned
    when none matches.
    """
    for index, rule in enumerate(table.rules):
        if rule.matches(key, stash):
            logger.debug("%s: rule #%d %r matched %s",
                         table.name, index, rule, key)
            return rule.resolve(key, stash)
    logger.debug("%s: no rule matched %s, using default", table.name, key)
    if callable(table.default):
        return table.default(key, stash)
    return table.default


def _synth(xf, f, xm=0, m=0):
    return xf + f, (xm << 4) + m


# Synthesized family/model rules

def F(xf, f, result):
    return Rule(MatchKind.FAMILY, _synth(xf, f)[:1], result)


def FQ(xf, f, q, result):
    return Rule(MatchKind.FAMILY, _synth(xf, f)[:1], result, q)


def FM(xf, f, xm, m, result):
    return Rule(MatchKind.FAMILY_MODEL, _synth(xf, f, xm, m), result)


def FMQ(xf, f, xm, m, q, result):
    return Rule(MatchKind.FAMILY_MODEL, _synth(xf, f, xm, m), result, q)


def FMS(xf, f, xm, m, s, result):
    return Rule(MatchKind.FAMILY_MODEL_STEPPING,
                _synth(xf, f, xm, m) + (s,), result)


def FMSQ(xf, f, xm, m, s, q, result):
    return Rule(MatchKind.FAMILY_MODEL_STEPPING,
                _synth(xf, f, xm, m) + (s,), result, q)


# Legacy 4-bit family/model rules

def TF(f, result):
    return Rule(MatchKind.LEGACY_FAMILY, (f,), result)


def TFM(f, m, result):
    return Rule(MatchKind.LEGACY_FAMILY_MODEL, (f, m), result)


def TFMQ(f, m, q, result):
    return Rule(MatchKind.LEGACY_FAMILY_MODEL, (f, m), result, q)


def TFMS(f, m, s, result):
    return Rule(MatchKind.LEGACY_FAMILY_MODEL_STEPPING, (f, m, s), result)


def TFMSQ(f, m, s, q, result):
    return Rule(MatchKind.LEGACY_FAMILY_MODEL_STEPPING, (f, m, s), result, q)
