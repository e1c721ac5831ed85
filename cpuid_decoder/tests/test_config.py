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
cpuid_decoder.tests.test_config
===============================

Tests for cpuid_decoder.config module
"""

from tempfile import TemporaryDirectory
from unittest import TestCase
from unittest.mock import patch
import os

from cpuid_decoder.config import (
    CONFIG_FILENAME,
    ConfigError,
    Configuration,
    load_config,
    search_configs,
)


class ConfigurationTests(TestCase):

    def test_defaults(self):
        cfg = Configuration()
        self.assertEqual(cfg.output_format, "text")
        self.assertTrue(cfg.show_uarch)
        self.assertTrue(cfg.show_amd_model)
        self.assertIsNone(cfg.cpu)
        self.assertEqual(cfg.get_origin("output", "format"), "")

    def test_from_text(self):
        cfg = Configuration.from_text(
            "[output]\nformat = json\nshow_uarch = no\n"
            "[decode]\ncpu = 3\n", "test")
        self.assertEqual(cfg.output_format, "json")
        self.assertFalse(cfg.show_uarch)
        self.assertTrue(cfg.show_amd_model)
        self.assertEqual(cfg.cpu, 3)
        self.assertEqual(cfg.get_origin("decode", "cpu"), "test")
        self.assertEqual(cfg.sources, ["test"])

    def test_unknown_entries_are_ignored(self):
        with self.assertLogs("cpuid_decoder.config", "DEBUG") as logs:
            cfg = Configuration.from_text(
                "[output]\ncolour = yes\n[launcher]\nversion = 1\n", "test")
        self.assertEqual(cfg.output_format, "text")
        self.assertEqual(len(logs.output), 2)

    def test_bad_format(self):
        with self.assertRaises(ConfigError):
            Configuration.from_text("[output]\nformat = yaml\n", "test")

    def test_bad_boolean(self):
        with self.assertRaises(ConfigError):
            Configuration.from_text("[output]\nshow_uarch = maybe\n", "test")

    def test_bad_cpu(self):
        with self.assertRaises(ConfigError):
            Configuration.from_text("[decode]\ncpu = first\n", "test")

    def test_syntax_error(self):
        with self.assertRaises(ConfigError):
            Configuration.from_text("format = text\n", "test")

    def test_set_value(self):
        cfg = Configuration()
        cfg.set_value("output", "show_amd_model", "off", "command line")
        self.assertFalse(cfg.show_amd_model)
        self.assertEqual(
            cfg.get_origin("output", "show_amd_model"), "command line")

    def test_update_keeps_defaults_of_other(self):
        cfg = Configuration.from_text("[output]\nformat = xml\n", "first")
        cfg.update_from_another(
            Configuration.from_text("[decode]\ncpu = 1\n", "second"),
            "second")
        self.assertEqual(cfg.output_format, "xml")
        self.assertEqual(cfg.cpu, 1)
        self.assertEqual(cfg.sources, ["first", "second"])

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            Configuration.from_path("/nonexistent/cpuid-decoder.conf")


class LoadConfigTests(TestCase):

    def write(self, directory, text):
        path = os.path.join(directory, CONFIG_FILENAME)
        with open(path, "wt", encoding="UTF-8") as stream:
            stream.write(text)
        return path

    def test_explicit_path(self):
        with TemporaryDirectory() as tmp:
            path = self.write(tmp, "[output]\nformat = xml\n")
            cfg = load_config(path)
        self.assertEqual(cfg.output_format, "xml")
        self.assertEqual(cfg.get_origin("output", "format"),
                         "config file: {}".format(path))

    def test_search_priority(self):
        with TemporaryDirectory() as high, TemporaryDirectory() as low:
            self.write(high, "[output]\nformat = json\n")
            self.write(low, "[output]\nformat = xml\nshow_uarch = no\n")
            with patch("cpuid_decoder.config.SEARCH_DIRS", [high, low]):
                self.assertEqual(len(search_configs()), 2)
                cfg = load_config()
        self.assertEqual(cfg.output_format, "json")
        self.assertFalse(cfg.show_uarch)

    def test_nothing_found(self):
        with TemporaryDirectory() as tmp:
            with patch("cpuid_decoder.config.SEARCH_DIRS", [tmp]):
                cfg = load_config()
        self.assertEqual(cfg.output_format, "text")
        self.assertEqual(cfg.sources, [])
