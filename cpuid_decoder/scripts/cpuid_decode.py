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
Decode a CPUID dump and print the identification of each CPU.

The dump is read from a file or from standard input, in the format of
``cpuid -r``::

    CPU 0:
       0x00000000 0x00: eax=0x0000000d ebx=0x756e6547 ecx=0x6c65746e ...
"""

import argparse
import logging
import sys

from cpuid_decoder.config import (
    OUTPUT_FORMATS,
    ConfigError,
    load_config,
)
from cpuid_decoder.decoder import decode_dump
from cpuid_decoder.exporter import get_all_exporters, get_report_data
from cpuid_decoder.parsers.dump import DumpParseError, parse_dump


logger = logging.getLogger(__name__)

ORIGIN = "command line"


def select_cpus(cpus, index):
    """
    Keep the CPU with the given index, or every CPU when ``index`` is
    ``None``.
    """
    if index is None:
        return cpus
    selected = [(cpu, leaf_dump) for cpu, leaf_dump in cpus if cpu == index]
    if not selected:
        raise SystemExit("CPU {} is not in the dump".format(index))
    return selected


def write_report(cpus, config, stream, option_list=None):
    """
    Decode ``cpus`` (a list of ``(index, leaf_dump)``) and write the report
    in the configured format to the binary ``stream``.

    ``option_list`` is passed to the exporter; options it does not support
    end the program.
    """
    try:
        exporter = get_all_exporters()[config.output_format](option_list)
    except ValueError as exc:
        raise SystemExit(str(exc))
    entries = []
    for index, leaf_dump in select_cpus(cpus, config.cpu):
        stash, result = decode_dump(
            leaf_dump, show_uarch=config.show_uarch,
            show_amd_model=config.show_amd_model)
        logger.debug("CPU %d: %r", index, result)
        entries.append((index, stash, result))
    exporter.dump(get_report_data(entries), stream)


def _print_output_option_list():
    print("Each format may support a different set of options")
    for name, exporter in get_all_exporters().items():
        print("{}: {}".format(
            name, ", ".join(exporter.SUPPORTED_OPTION_LIST) or "none"))


def _apply_args(config, args):
    try:
        if args.cpu is not None:
            config.set_value('decode', 'cpu', args.cpu, ORIGIN)
        if args.format is not None:
            config.set_value('output', 'format', args.format, ORIGIN)
        if args.no_uarch:
            config.set_value('output', 'show_uarch', 'no', ORIGIN)
        if args.no_amd_model:
            config.set_value('output', 'show_amd_model', 'no', ORIGIN)
    except ConfigError as exc:
        raise SystemExit(str(exc))


def _read_dump(path):
    try:
        if path:
            with open(path, encoding='UTF-8') as stream:
                return parse_dump(stream)
        return parse_dump(sys.stdin)
    except DumpParseError as exc:
        raise SystemExit("{}: {}".format(path or "<stdin>", exc))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Decode the x86 processor identification from a CPUID"
                    " dump")
    parser.add_argument(
        '-f', '--file',
        help="Path to the dump; standard input is read when omitted")
    parser.add_argument(
        '--cpu', help="Index of the CPU to decode, or 'all'")
    parser.add_argument(
        '--format', choices=OUTPUT_FORMATS, help="Report format")
    parser.add_argument(
        '--config', help="Read only this configuration file")
    parser.add_argument(
        '--no-uarch', action='store_true',
        help="Do not append the microarchitecture to the model name")
    parser.add_argument(
        '--no-amd-model', action='store_true',
        help="Do not append the AMD model number to the model name")
    parser.add_argument(
        '-p', '--output-options', default='', metavar='OPTIONS',
        help="Comma-separated list of options for the report format"
             " (pass ? for a list of choices)")
    parser.add_argument(
        '--debug', action='store_true', help="Turn on debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        raise SystemExit(str(exc))
    _apply_args(config, args)
    if args.output_options == '?':
        _print_output_option_list()
        return 0
    option_list = None
    if args.output_options:
        option_list = args.output_options.split(',')

    cpus = _read_dump(args.file)
    if not cpus:
        raise SystemExit("No CPUID data found")
    write_report(cpus, config, sys.stdout.buffer, option_list)
    return 0


if __name__ == '__main__':
    sys.exit(main())
