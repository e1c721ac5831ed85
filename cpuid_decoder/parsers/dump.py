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
:mod:`cpuid_decoder.parsers.dump` -- `cpuid -r` dump parser
===========================================================

Parser for the raw register dumps printed by ``cpuid -r``. The syntax is
line oriented::

    Document: (Comment | CpuHeader | Leaf | BLANK)*

    CpuHeader: 'CPU' NUMBER ':'

    Leaf: HEX [HEX] ':' 'eax=' HEX 'ebx=' HEX 'ecx=' HEX 'edx=' HEX

    Comment: '#' ANYTHING

The second number of a leaf line is the subleaf; it is 0 when missing.
Leaf lines before the first ``CPU`` header belong to CPU 0, so a dump of
a single processor needs no header at all.
"""

import io
import logging

import pyparsing as p

from cpuid_decoder.leaves import LeafDump


logger = logging.getLogger(__name__)


class DumpParseError(ValueError):
    """
    A line of the dump could not be parsed.

    :ivar line: 1-based line number
    :ivar column: 1-based column within the line
    """

    def __init__(self, message, line, column):
        super().__init__("line {}, column {}: {}".format(
            line, column, message))
        self.line = line
        self.column = column


def _hex(tokens):
    return int(tokens[0], 16)


HEX = p.Regex(r"0[xX][0-9a-fA-F]+").setParseAction(_hex)
NUMBER = p.Word(p.nums).setParseAction(lambda tokens: int(tokens[0]))


def _register(name):
    return p.Suppress(p.CaselessLiteral(name + "=")) + HEX(name)


CpuHeader = (
    p.Suppress(p.CaselessKeyword("CPU")) + NUMBER("cpu") + p.Suppress(":")
)

Leaf = (
    HEX("leaf") + p.Optional(HEX("subleaf")) + p.Suppress(":")
    + _register("eax") + _register("ebx") + _register("ecx")
    + _register("edx")
)

Line = (CpuHeader | Leaf) + p.StringEnd()


class DumpParser:
    """Parser for ``cpuid -r`` output."""

    def __init__(self, stream):
        self.stream = stream

    def run(self, result):
        """
        Parse the stream, calling ``result.addCpu(index, leaf_dump)`` once
        per CPU in the order they appear.
        """
        index = None
        leaf_dump = None
        for lineno, line in enumerate(self.stream, 1):
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            tokens = self._parse_line(line, lineno)
            if "cpu" in tokens:
                if leaf_dump is not None:
                    result.addCpu(index, leaf_dump)
                index = tokens["cpu"]
                leaf_dump = LeafDump()
                continue
            if leaf_dump is None:
                index = 0
                leaf_dump = LeafDump()
            leaf_dump.add(
                tokens["leaf"], tokens.get("subleaf", 0), tokens["eax"],
                tokens["ebx"], tokens["ecx"], tokens["edx"])
        if leaf_dump is not None:
            result.addCpu(index, leaf_dump)

    def _parse_line(self, line, lineno):
        try:
            return Line.parseString(line.rstrip())
        except p.ParseException as exc:
            logger.debug("cannot parse line %d: %r", lineno, line)
            raise DumpParseError(
                "expected a CPU header or a leaf line", lineno,
                exc.col) from exc


class DumpResult:
    """
    Collect the CPUs of a dump as a list of ``(index, leaf_dump)``.
    """

    def __init__(self):
        self.cpus = []

    def addCpu(self, index, leaf_dump):
        self.cpus.append((index, leaf_dump))


def parse_dump(stream):
    """
    Parse ``stream`` and return a list of ``(index, leaf_dump)`` pairs.
    """
    result = DumpResult()
    DumpParser(stream).run(result)
    return result.cpus


def parse_dump_text(text):
    """
    Parse a dump held in a string and return one
    :class:`~cpuid_decoder.leaves.LeafDump` per CPU.
    """
    return [leaf_dump for _, leaf_dump in parse_dump(io.StringIO(text))]
