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
:mod:`cpuid_decoder.exporter.text` -- plain text exporter
=========================================================

Line oriented output in the style of the ``cpuid`` tool: one block per
CPU with derived values shown as ``(name) = value``.
"""

from cpuid_decoder.exporter import ReportExporterBase


class TextReportExporter(ReportExporterBase):

    """Human-readable report exporter."""

    OPTION_NO_HEADER = 'no-header'
    SUPPORTED_OPTION_LIST = (OPTION_NO_HEADER, )

    def dump(self, data, stream):
        for cpu in data:
            for line in self._lines(cpu):
                stream.write("{}\n".format(line).encode("UTF-8"))

    def _lines(self, cpu):
        indent = ""
        if self.OPTION_NO_HEADER not in self._option_list:
            yield "CPU {}:".format(cpu["index"])
            indent = "   "

        def field(name, value):
            return "{}{:<29}= {}".format(indent, name, value)

        yield field("vendor", cpu["vendor"] or "unknown")
        if cpu["hypervisor"]:
            yield field("hypervisor", cpu["hypervisor"])
        yield field("family", "{:#x} ({})".format(
            cpu["family"], cpu["family"]))
        yield field("model", "{:#x} ({})".format(cpu["model"], cpu["model"]))
        yield field("stepping", "{:#x} ({})".format(
            cpu["stepping"], cpu["stepping"]))
        if cpu["brand"]:
            yield field("brand", cpu["brand"])
        if cpu["synth"] is not None:
            yield field("(synth)", cpu["synth"])
        uarch = cpu["uarch"]
        if uarch:
            yield field("(uarch synth)", " ".join(
                text for text in (
                    uarch["uarch"],
                    "{{{}}}".format(uarch["family"])
                    if uarch["family"] else None,
                    uarch["phys"]) if text))
        if cpu["amd_model"]:
            yield field("(AMD model)", cpu["amd_model"])
        mp = cpu["mp"]
        yield field("(multi-processing method)", mp["method"] or "none")
        yield field("(multi-processing synth)", mp["synth"])
        widths = cpu["apic_widths"]
        if widths:
            text = "CORE_width={} SMT_width={}".format(
                widths["core"], widths["smt"])
            if widths["compute_unit"] is not None:
                text += " CU_width={}".format(widths["compute_unit"])
            yield field("(APIC widths synth)", text)
            yield field("(APIC package start)", widths["package"])
