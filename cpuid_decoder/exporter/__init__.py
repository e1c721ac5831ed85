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
:mod:`cpuid_decoder.exporter` -- report exporters
=================================================

Exporters write the decoded CPUs of one dump to a binary stream. All of
them work from the same plain data produced by :func:`get_report_data`,
so that a field added there shows up in every format.
"""

from abc import ABCMeta, abstractmethod
from collections import OrderedDict


class ReportExporterBase(metaclass=ABCMeta):
    """
    Base class for exporters of decoded CPUs.

    Each exporter can support a set of options (boolean flags) that alter
    the way it operates.
    """

    SUPPORTED_OPTION_LIST = ()

    def __init__(self, option_list=None):
        if option_list is None:
            option_list = []
        for option in option_list:
            if option not in self.SUPPORTED_OPTION_LIST:
                raise ValueError("Unsupported option: {}".format(option))
        self._option_list = option_list

    @abstractmethod
    def dump(self, data, stream):
        """
        Dump data to stream.

        :param data: the list returned by :func:`get_report_data`
        :param stream: a binary stream
        """


def mp_synth(mp):
    """
    Describe a :class:`~cpuid_decoder.topology.MpInfo` in words.
    """
    if mp is None or mp.method is None:
        return "none"
    parts = []
    if mp.cores > 1:
        parts.append("multi-core (c={})".format(mp.cores))
    if mp.hyperthreads > 1:
        parts.append("hyper-threaded (t={})".format(mp.hyperthreads))
    return ", ".join(parts) or "none"


def cpu_data(index, stash, result):
    """
    Plain data of one decoded CPU.

    :param index: CPU number from the dump
    :param stash: its :class:`~cpuid_decoder.stash.Stash`
    :param result: its :class:`~cpuid_decoder.decoder.DecodeResult`
    """
    key = stash.key
    data = OrderedDict()
    data["index"] = index
    data["vendor"] = result.vendor_name
    data["hypervisor"] = result.hypervisor
    data["family"] = key.synth_family
    data["model"] = key.synth_model
    data["stepping"] = key.stepping
    data["brand"] = result.brand or None
    data["synth"] = result.synth
    data["model_name"] = result.model
    arch = result.arch
    if arch:
        data["uarch"] = OrderedDict([
            ("uarch", arch.uarch),
            ("family", arch.family),
            ("phys", arch.phys),
        ])
    else:
        data["uarch"] = None
    data["amd_model"] = result.amd_model
    mp = result.mp
    data["mp"] = OrderedDict([
        ("method", mp.method if mp else None),
        ("cores", mp.cores if mp else 1),
        ("hyperthreads", mp.hyperthreads if mp else 1),
        ("synth", mp_synth(mp)),
    ])
    widths = result.widths
    if widths is not None:
        data["apic_widths"] = OrderedDict(widths._asdict())
    else:
        data["apic_widths"] = None
    return data


def get_report_data(entries):
    """
    Plain data of a whole report.

    :param entries: iterable of ``(index, stash, result)`` triples
    :returns: a list with one :func:`cpu_data` mapping per CPU
    """
    return [cpu_data(index, stash, result)
            for index, stash, result in entries]


def get_all_exporters():
    """
    Map format names to exporter classes.
    """
    # Imported here as the exporters import this module
    from cpuid_decoder.exporter.json import JSONReportExporter
    from cpuid_decoder.exporter.text import TextReportExporter
    from cpuid_decoder.exporter.xml import XMLReportExporter
    return OrderedDict([
        ("text", TextReportExporter),
        ("xml", XMLReportExporter),
        ("json", JSONReportExporter),
    ])
