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
This module provides an entry point to cpuid-decoder-parse.

The command turns the output of system commands into json. When a new
parser is added, it should be added to the AVAILABLE_PARSERS mapping.
"""

import io
import json
import sys

from argparse import ArgumentParser

from cpuid_decoder.parsers import dump

AVAILABLE_PARSERS = {
    'cpuid-dump': dump.parse_dump_text,
}
PARSER_LIST = sorted(list(AVAILABLE_PARSERS.keys()))


def main():
    """Entry point to the program."""
    arg_parser = ArgumentParser(
        description="parse stdin with the specified parser")
    arg_parser.add_argument(
        "parser_name", metavar="PARSER-NAME",
        choices=['?'] + PARSER_LIST,
        help="Name of the parser to use")
    args = arg_parser.parse_args()
    if args.parser_name == '?':
        print("The following parsers are available:")
        print("\n".join(PARSER_LIST))
        raise SystemExit()
    parser = AVAILABLE_PARSERS[args.parser_name]
    with io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8') as stdin:
        try:
            text = stdin.read()
            print(run_parsing(parser, text))
        except UnicodeDecodeError as exc:
            msg = "Failed to decode input stream: {}".format(str(exc))
            raise SystemExit(msg) from exc


def run_parsing(parser_fn, text):
    """Do the actual parsing."""
    try:
        ast = parser_fn(text)
        return json.dumps(
            ast, indent=4, sort_keys=True, default=_json_fallback)
    except ValueError as exc:
        msg = "Failed to parse the text: {}".format(str(exc))
        raise SystemExit(msg) from exc


def _json_fallback(obj):
    """
    Helper method to convert arbitrary objects to their JSON
    representation.

    Anything that has a 'as_json' attribute will be converted to the result
    of calling that method. For all other objects __dict__ is returned.
    """
    if hasattr(obj, "as_json"):
        return obj.as_json()
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    raise NotImplementedError(
        "unable to json-ify {!r}".format(obj.__class__))
