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
cpuid_decoder.exporter.tests.test_exporters
===========================================

Tests for the text, JSON and XML report exporters
"""

from io import BytesIO
from unittest import TestCase
import json

from lxml import etree as ET

from cpuid_decoder.decoder import decode_dump
from cpuid_decoder.exporter import (
    ReportExporterBase,
    get_all_exporters,
    get_report_data,
    mp_synth,
)
from cpuid_decoder.exporter.json import JSONReportExporter
from cpuid_decoder.exporter.text import TextReportExporter
from cpuid_decoder.exporter.xml import XMLReportExporter
from cpuid_decoder.tests.dumps import AMD, INTEL, make_leaf_dump
from cpuid_decoder.topology import NO_MP, MpInfo

HTT = 1 << 28


def ivy_bridge_dump():
    return make_leaf_dump(
        INTEL, 0x000306a9, ebx1=0x00100800, edx1=HTT, max_basic=0xd,
        brand="Intel(R) Core(TM) i7-3770 CPU @ 3.40GHz",
        hypervisor="KVMKVMKVM", leaves={
            (0xb, 0): (1, 2, 0x100, 0),
            (0xb, 1): (4, 8, 0x201, 0),
            (0xb, 2): (0, 0, 0x002, 0),
        })


def report(*dumps):
    entries = []
    for index, leaf_dump in enumerate(dumps):
        stash, result = decode_dump(leaf_dump)
        entries.append((index, stash, result))
    return get_report_data(entries)


def export(exporter, data):
    stream = BytesIO()
    exporter.dump(data, stream)
    return stream.getvalue().decode("UTF-8")


class ReportDataTests(TestCase):

    def test_cpu_data(self):
        cpu, = report(ivy_bridge_dump())
        self.assertEqual(cpu["index"], 0)
        self.assertEqual(cpu["vendor"], "Intel")
        self.assertEqual(cpu["hypervisor"], "KVM")
        self.assertEqual(
            (cpu["family"], cpu["model"], cpu["stepping"]), (6, 0x3a, 9))
        self.assertEqual(cpu["uarch"]["uarch"], "Ivy Bridge")
        self.assertEqual(cpu["mp"]["method"], "Intel leaf 0xb")
        self.assertEqual(cpu["mp"]["synth"],
                         "multi-core (c=4), hyper-threaded (t=2)")
        self.assertEqual(cpu["apic_widths"]["package"], 4)

    def test_unknown_vendor(self):
        cpu, = report(make_leaf_dump("MiSTer AO486", 0x00000400))
        self.assertIsNone(cpu["vendor"])
        self.assertIsNone(cpu["synth"])
        self.assertIsNone(cpu["uarch"])
        self.assertIsNone(cpu["apic_widths"])
        self.assertEqual(cpu["mp"]["method"], None)

    def test_mp_synth(self):
        self.assertEqual(mp_synth(NO_MP), "none")
        self.assertEqual(mp_synth(None), "none")
        self.assertEqual(mp_synth(MpInfo("AMD leaf 1", 1, 2)),
                         "hyper-threaded (t=2)")
        self.assertEqual(mp_synth(MpInfo("AMD leaf 1", 1, 1)), "none")

    def test_registry(self):
        exporters = get_all_exporters()
        self.assertEqual(list(exporters), ["text", "xml", "json"])
        for exporter_cls in exporters.values():
            self.assertTrue(issubclass(exporter_cls, ReportExporterBase))

    def test_unsupported_option(self):
        with self.assertRaises(ValueError):
            XMLReportExporter(option_list=["no-header"])


def field(name, value, indent="   "):
    return "{}{:<29}= {}".format(indent, name, value)


class TextExporterTests(TestCase):

    def test_lines(self):
        text = export(TextReportExporter(), report(ivy_bridge_dump()))
        lines = text.splitlines()
        self.assertEqual(lines[0], "CPU 0:")
        self.assertIn(field("vendor", "Intel"), lines)
        self.assertIn(field("hypervisor", "KVM"), lines)
        self.assertIn(field("model", "0x3a (58)"), lines)
        self.assertIn(field(
            "(synth)", "Intel Core i3-3000 / i5-3000 / i7-3000"
            " (Ivy Bridge E1/N0/L1) {Sandy Bridge}, 22nm"), lines)
        self.assertIn(field(
            "(uarch synth)", "Ivy Bridge {Sandy Bridge} 22nm"), lines)
        self.assertIn(field(
            "(multi-processing method)", "Intel leaf 0xb"), lines)
        self.assertIn(field(
            "(multi-processing synth)",
            "multi-core (c=4), hyper-threaded (t=2)"), lines)
        self.assertIn(field(
            "(APIC widths synth)", "CORE_width=3 SMT_width=1"), lines)
        self.assertIn(field("(APIC package start)", "4"), lines)

    def test_no_header(self):
        exporter = TextReportExporter(
            option_list=[TextReportExporter.OPTION_NO_HEADER])
        text = export(exporter, report(ivy_bridge_dump()))
        self.assertEqual(text.splitlines()[0],
                         field("vendor", "Intel", indent=""))

    def test_method_none(self):
        text = export(TextReportExporter(),
                      report(make_leaf_dump(AMD, 0x00000f48, ebx1=0x2a)))
        lines = text.splitlines()
        self.assertIn(field("(multi-processing method)", "none"), lines)
        self.assertIn(field("(AMD model)", "Processor 3200+"), lines)
        self.assertNotIn("APIC", text)

    def test_one_block_per_cpu(self):
        text = export(TextReportExporter(),
                      report(ivy_bridge_dump(), ivy_bridge_dump()))
        self.assertIn("CPU 0:\n", text)
        self.assertIn("CPU 1:\n", text)


class JSONExporterTests(TestCase):

    def test_round_trip(self):
        data = report(ivy_bridge_dump())
        text = export(JSONReportExporter(), data)
        self.assertEqual(json.loads(text), json.loads(json.dumps(data)))
        self.assertIn("\n    ", text)

    def test_machine_json(self):
        exporter = JSONReportExporter(
            option_list=[JSONReportExporter.OPTION_MACHINE_JSON])
        text = export(exporter, report(ivy_bridge_dump()))
        self.assertEqual(text.count("\n"), 1)
        self.assertNotIn('": ', text)


class XMLExporterTests(TestCase):

    def parse(self, *dumps):
        stream = BytesIO()
        XMLReportExporter().dump(report(*dumps), stream)
        return stream.getvalue()

    def test_declaration(self):
        self.assertTrue(self.parse(ivy_bridge_dump()).startswith(
            b"<?xml version='1.0' encoding='UTF-8'?>"))

    def test_document(self):
        root = ET.fromstring(self.parse(ivy_bridge_dump()))
        self.assertEqual(root.tag, "cpuid-report")
        self.assertEqual(root.get("version"), "1.0")
        cpu = root.find("cpu")
        self.assertEqual(cpu.get("index"), "0")
        self.assertEqual(cpu.findtext("vendor"), "Intel")
        self.assertEqual(cpu.find("signature").get("model"), "58")
        self.assertEqual(
            cpu.findtext("brand"), "Intel(R) Core(TM) i7-3770 CPU @ 3.40GHz")
        self.assertEqual(cpu.find("uarch").get("name"), "Ivy Bridge")
        self.assertIsNone(cpu.find("uarch").get("core-is-uarch"))
        mp = cpu.find("multi-processing")
        self.assertEqual(mp.get("method"), "Intel leaf 0xb")
        self.assertEqual(mp.get("cores"), "4")
        widths = cpu.find("apic-widths")
        self.assertEqual(widths.get("core"), "3")
        self.assertIsNone(widths.get("compute-unit"))

    def test_unknown_vendor(self):
        root = ET.fromstring(
            self.parse(make_leaf_dump("MiSTer AO486", 0x00000400)))
        cpu = root.find("cpu")
        self.assertIsNone(cpu.find("vendor"))
        self.assertIsNone(cpu.find("synth"))
        self.assertIsNone(cpu.find("multi-processing").get("method"))

    def test_control_characters_are_dropped(self):
        root = ET.fromstring(self.parse(make_leaf_dump(
            INTEL, 0x000306a9, brand="Intel\x01(R) Core(TM)")))
        self.assertEqual(root.find("cpu").findtext("brand"),
                         "Intel(R) Core(TM)")
