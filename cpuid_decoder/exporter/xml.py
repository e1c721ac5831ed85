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
:mod:`cpuid_decoder.exporter.xml` -- XML exporter
=================================================

The document looks like::

    <cpuid-report version="1.0">
      <cpu index="0">
        <vendor>Intel</vendor>
        <signature family="6" model="58" stepping="9"/>
        <brand>...</brand>
        <synth>...</synth>
        <uarch name="Ivy Bridge" family="Sandy Bridge" phys="22nm"/>
        <multi-processing method="Intel leaf 0xb" cores="4"
                          hyperthreads="2"/>
        <apic-widths smt="1" core="3" package="4"/>
      </cpu>
    </cpuid-report>
"""

from io import BytesIO
import re

from lxml import etree as ET

from cpuid_decoder.exporter import ReportExporterBase


# Control characters, EXCEPT for the newline, carriage return, tab and
# vertical space, which lxml refuses in text nodes
CONTROL_CODE_RE_STR = re.compile(
    "(?![\n\r\t\v])[\u0000-\u001F]|[\u007F-\u009F]")

REPORT_VERSION = "1.0"


def _text(value):
    return CONTROL_CODE_RE_STR.sub("", str(value))


def _attrib(mapping):
    return {name.replace("_", "-"): _text(value)
            for name, value in mapping.items() if value is not None}


class XMLReportExporter(ReportExporterBase):
    """
    Report exporter creating XML documents
    """

    def dump(self, data, stream):
        """
        Public method to dump the XML report to a stream
        """
        root = self.get_root_element(data)
        # lxml always produces bytes, go through a helper stream so that
        # the declaration and the encoding stay consistent
        with BytesIO() as helper_stream:
            ET.ElementTree(root).write(
                helper_stream, xml_declaration=True, encoding="UTF-8",
                pretty_print=True)
            stream.write(helper_stream.getvalue())

    def get_root_element(self, data):
        """
        Get the XML element of the document exported from the given data
        """
        root = ET.Element("cpuid-report", attrib={"version": REPORT_VERSION})
        for cpu in data:
            self._add_cpu(root, cpu)
        return root

    def _add_cpu(self, element, cpu):
        node = ET.SubElement(
            element, "cpu", attrib={"index": str(cpu["index"])})
        for name in ("vendor", "hypervisor"):
            if cpu[name]:
                ET.SubElement(node, name).text = _text(cpu[name])
        ET.SubElement(node, "signature", attrib=_attrib({
            "family": cpu["family"],
            "model": cpu["model"],
            "stepping": cpu["stepping"],
        }))
        for name in ("brand", "synth"):
            if cpu[name]:
                ET.SubElement(node, name).text = _text(cpu[name])
        if cpu["model_name"]:
            ET.SubElement(node, "model-name").text = _text(cpu["model_name"])
        if cpu["uarch"]:
            uarch = dict(cpu["uarch"])
            uarch["name"] = uarch.pop("uarch")
            ET.SubElement(node, "uarch", attrib=_attrib(uarch))
        if cpu["amd_model"]:
            ET.SubElement(node, "amd-model").text = _text(cpu["amd_model"])
        mp = cpu["mp"]
        ET.SubElement(node, "multi-processing", attrib=_attrib({
            "method": mp["method"],
            "cores": mp["cores"],
            "hyperthreads": mp["hyperthreads"],
        }))
        if cpu["apic_widths"]:
            ET.SubElement(
                node, "apic-widths", attrib=_attrib(cpu["apic_widths"]))
