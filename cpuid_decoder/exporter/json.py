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
:mod:`cpuid_decoder.exporter.json` -- JSON exporter
===================================================
"""

import json

from cpuid_decoder.exporter import ReportExporterBase


class JSONReportExporter(ReportExporterBase):
    """
    Report exporter creating JSON documents
    """

    OPTION_MACHINE_JSON = 'machine-json'

    SUPPORTED_OPTION_LIST = (OPTION_MACHINE_JSON, )

    def dump(self, data, stream):
        if self.OPTION_MACHINE_JSON in self._option_list:
            text = json.dumps(data, ensure_ascii=False,
                              indent=None, separators=(',', ':'))
        else:
            text = json.dumps(data, ensure_ascii=False, indent=4)
        stream.write(text.encode("UTF-8"))
        stream.write(b"\n")
