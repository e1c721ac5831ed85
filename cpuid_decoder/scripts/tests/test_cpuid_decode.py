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
from tempfile import TemporaryDirectory
from unittest import TestCase
from unittest.mock import patch

from cpuid_decoder.config import Configuration
from cpuid_decoder.parsers.dump import parse_dump
from cpuid_decoder.scripts.cpuid_decode import (
    main,
    select_cpus,
    write_report,
)

DATA_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
    "parsers", "tests", "cpuid_data")


def data_path(name):
    return os.path.join(DATA_DIR, "{}.txt".format(name))


def load(name):
    with open(data_path(name), 'rt', encoding='UTF-8') as stream:
        return parse_dump(stream)


class SelectCpusTests(TestCase):

    def test_all(self):
        cpus = load("ivy-bridge")
        self.assertEqual(select_cpus(cpus, None), cpus)

    def test_one(self):
        selected = select_cpus(load("ivy-bridge"), 1)
        self.assertEqual([index for index, _ in selected], [1])

    def test_missing(self):
        with self.assertRaises(SystemExit) as context:
            select_cpus(load("ivy-bridge"), 7)
        self.assertEqual(str(context.exception), "CPU 7 is not in the dump")


class WriteReportTests(TestCase):

    def test_json(self):
        cfg = Configuration.from_text("[output]\nformat = json\n", "test")
        stream = io.BytesIO()
        write_report(load("ivy-bridge"), cfg, stream)
        data = json.loads(stream.getvalue().decode("UTF-8"))
        self.assertEqual([cpu["index"] for cpu in data], [0, 1])
        self.assertEqual(
            data[0]["synth"],
            "Intel Core i3-3000 / i5-3000 / i7-3000 (Ivy Bridge E1/N0/L1)"
            " {Sandy Bridge}, 22nm")
        self.assertEqual(data[0]["mp"]["cores"], 4)
        self.assertEqual(data[0]["mp"]["hyperthreads"], 2)

    def test_display_options(self):
        cfg = Configuration.from_text(
            "[output]\nformat = json\nshow_uarch = no\nshow_amd_model = no\n",
            "test")
        stream = io.BytesIO()
        write_report(load("single"), cfg, stream)
        cpu, = json.loads(stream.getvalue().decode("UTF-8"))
        self.assertEqual(cpu["synth"], "AMD Athlon 64 (ClawHammer SH7-C0)")
        self.assertEqual(cpu["amd_model"], "Processor 3200+")


class MainTests(TestCase):

    def run_main(self, *args):
        stdout = io.TextIOWrapper(io.BytesIO(), encoding="UTF-8")
        with TemporaryDirectory() as tmp:
            with patch("cpuid_decoder.config.SEARCH_DIRS", [tmp]), \
                    patch("sys.stdout", stdout):
                self.assertEqual(main(list(args)), 0)
                stdout.flush()
        return stdout.buffer.getvalue().decode("UTF-8")

    def test_text_report(self):
        text = self.run_main("-f", data_path("single"))
        self.assertIn("CPU 0:", text)
        self.assertIn(
            "AMD Athlon 64 (ClawHammer SH7-C0) Processor 3200+ [K8], 130nm",
            text)

    def test_cpu_and_format(self):
        text = self.run_main(
            "-f", data_path("ivy-bridge"), "--cpu", "1", "--format", "xml")
        self.assertIn('<cpu index="1">', text)
        self.assertNotIn('<cpu index="0">', text)

    def test_no_uarch_flag(self):
        text = self.run_main(
            "-f", data_path("single"), "--no-uarch", "--no-amd-model")
        self.assertIn("= AMD Athlon 64 (ClawHammer SH7-C0)\n", text)

    def test_no_header_option(self):
        text = self.run_main("-f", data_path("single"), "-p", "no-header")
        self.assertNotIn("CPU 0:", text)
        self.assertTrue(text.startswith("vendor "))

    def test_machine_json_option(self):
        text = self.run_main(
            "-f", data_path("single"), "--format", "json",
            "-p", "machine-json")
        self.assertEqual(text.count("\n"), 1)
        self.assertNotIn('": ', text)
        self.assertEqual(json.loads(text)[0]["vendor"], "AMD")

    def test_unsupported_output_option(self):
        with self.assertRaises(SystemExit) as context:
            self.run_main(
                "-f", data_path("single"), "--format", "xml",
                "-p", "no-header")
        self.assertEqual(
            str(context.exception), "Unsupported option: no-header")

    def test_list_output_options(self):
        text = self.run_main("-p", "?")
        self.assertIn("text: no-header\n", text)
        self.assertIn("json: machine-json\n", text)
        self.assertIn("xml: none\n", text)

    def test_config_file(self):
        with TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "custom.conf")
            with open(path, "wt", encoding="UTF-8") as stream:
                stream.write("[output]\nformat = json\n[decode]\ncpu = 0\n")
            text = self.run_main(
                "-f", data_path("ivy-bridge"), "--config", path)
        self.assertEqual(len(json.loads(text)), 1)

    def test_command_line_beats_config_file(self):
        with TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "custom.conf")
            with open(path, "wt", encoding="UTF-8") as stream:
                stream.write("[output]\nformat = json\n")
            text = self.run_main(
                "-f", data_path("single"), "--config", path,
                "--format", "text")
        self.assertTrue(text.startswith("CPU 0:"))

    def test_stdin(self):
        with open(data_path("single"), 'rt', encoding='UTF-8') as stream:
            with patch("sys.stdin", io.StringIO(stream.read())):
                text = self.run_main("--format", "json")
        self.assertEqual(json.loads(text)[0]["vendor"], "AMD")

    def test_empty_dump(self):
        with patch("sys.stdin", io.StringIO("# nothing here\n")):
            with self.assertRaises(SystemExit) as context:
                self.run_main()
        self.assertEqual(str(context.exception), "No CPUID data found")

    def test_parse_error(self):
        with patch("sys.stdin", io.StringIO("CPU zero:\n")):
            with self.assertRaises(SystemExit) as context:
                self.run_main()
        self.assertIn("<stdin>: line 1", str(context.exception))

    def test_bad_cpu_argument(self):
        with self.assertRaises(SystemExit) as context:
            self.run_main("-f", data_path("single"), "--cpu", "first")
        self.assertIn("[decode] cpu", str(context.exception))

    def test_missing_config_file(self):
        with self.assertRaises(SystemExit) as context:
            self.run_main("--config", "/nonexistent/cpuid-decoder.conf")
        self.assertIn("file not found", str(context.exception))
