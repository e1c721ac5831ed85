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

import io
import json
import os
from unittest import TestCase

from cpuid_decoder.parsers import run_parsing
from cpuid_decoder.parsers.dump import (
    DumpParseError,
    DumpParser,
    parse_dump,
    parse_dump_text,
)


def data_path(name):
    return os.path.join(
        os.path.dirname(__file__), "cpuid_data", "{}.txt".format(name))


class DumpResult(object):

    def __init__(self):
        self.cpus = []

    def addCpu(self, index, leaf_dump):
        self.cpus.append((index, leaf_dump))


class TestDumpParser(TestCase):

    def parse(self, name):
        with open(data_path(name), 'rt', encoding='UTF-8') as stream:
            parser = DumpParser(stream)
            result = DumpResult()
            parser.run(result)
        return result.cpus

    def test_two_cpus(self):
        cpus = self.parse("ivy-bridge")
        self.assertEqual([index for index, _ in cpus], [0, 1])
        _, leaf_dump = cpus[1]
        self.assertEqual(len(leaf_dump), 12)
        self.assertEqual(leaf_dump.get(1).ebx, 0x01100800)
        self.assertEqual(leaf_dump.get(0xb, 1).ebx, 0x00000008)
        self.assertIsNone(leaf_dump.get(0xb, 3))

    def test_headerless_dump_is_cpu_0(self):
        cpus = self.parse("single")
        self.assertEqual(len(cpus), 1)
        index, leaf_dump = cpus[0]
        self.assertEqual(index, 0)
        self.assertEqual(len(leaf_dump), 4)

    def test_missing_subleaf_is_0(self):
        _, leaf_dump = self.parse("single")[0]
        self.assertEqual(leaf_dump.get(1, 0).eax, 0x00000f48)

    def test_register_names_are_caseless(self):
        _, leaf_dump = self.parse("single")[0]
        self.assertEqual(leaf_dump.get(0x80000000).eax, 0x80000001)

    def test_comments_and_blank_lines(self):
        cpus = parse_dump(io.StringIO(
            "# comment\n\nCPU 2:\n"
            "  0x00000000 0x00: eax=0x1 ebx=0x2 ecx=0x3 edx=0x4\n"
            "  # another\n"))
        self.assertEqual(len(cpus), 1)
        self.assertEqual(cpus[0][0], 2)
        self.assertEqual(tuple(cpus[0][1].get(0)), (1, 2, 3, 4))

    def test_empty_cpu_is_kept(self):
        cpus = parse_dump(io.StringIO("CPU 0:\nCPU 1:\n"))
        self.assertEqual([index for index, _ in cpus], [0, 1])
        self.assertEqual(len(cpus[0][1]), 0)

    def test_empty_input(self):
        self.assertEqual(parse_dump(io.StringIO("")), [])

    def test_bad_line(self):
        with self.assertRaises(DumpParseError) as context:
            parse_dump(io.StringIO(
                "CPU 0:\n"
                "   0x00000000 0x00: eax=0x1 ebx=0x2 ecx=0x3\n"))
        self.assertEqual(context.exception.line, 2)
        self.assertIn("line 2", str(context.exception))

    def test_garbage(self):
        with self.assertRaises(DumpParseError) as context:
            parse_dump(io.StringIO("vendor_id : GenuineIntel\n"))
        self.assertEqual(context.exception.line, 1)

    def test_parse_error_is_value_error(self):
        self.assertTrue(issubclass(DumpParseError, ValueError))


class TestParseDumpText(TestCase):

    def test_leaf_dumps(self):
        with open(data_path("ivy-bridge"), 'rt', encoding='UTF-8') as f:
            dumps = parse_dump_text(f.read())
        self.assertEqual(len(dumps), 2)
        self.assertEqual(dumps[0].get(0x80000004).ebx, 0x007a4847)

    def test_run_parsing_json(self):
        with open(data_path("single"), 'rt', encoding='UTF-8') as f:
            data = json.loads(run_parsing(parse_dump_text, f.read()))
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["0x00000001/0x00"]["ebx"], 0x2a)

    def test_run_parsing_error(self):
        with self.assertRaises(SystemExit):
            run_parsing(parse_dump_text, "not a dump\n")
