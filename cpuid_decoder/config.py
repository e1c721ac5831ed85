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
:mod:`cpuid_decoder.config` -- cpuid-decoder configuration
==========================================================

Defaults for the command line come from ``cpuid-decoder.conf``::

    [output]
    format = text
    show_uarch = yes
    show_amd_model = yes

    [decode]
    cpu = all
"""

from collections import OrderedDict, namedtuple
from configparser import ConfigParser, Error as ConfigParserError
import logging
import os


logger = logging.getLogger(__name__)

CONFIG_FILENAME = "cpuid-decoder.conf"

# The order here defines the priority
# --config > ~/.config > /etc/xdg > $SNAP_DATA
SEARCH_DIRS = [
    "~/.config/",
    "/etc/xdg/",
    "$SNAP_DATA",
]

OUTPUT_FORMATS = ("text", "xml", "json")

VarSpec = namedtuple('VarSpec', ['kind', 'default', 'help'])

CONFIG_SPEC = [
    ('output', {
        'format': VarSpec(
            str, 'text', "Report format, one of: text, xml, json"),
        'show_uarch': VarSpec(
            bool, True, "Append the microarchitecture to the model name"),
        'show_amd_model': VarSpec(
            bool, True, "Append the AMD model number to the model name"),
    }),
    ('decode', {
        'cpu': VarSpec(
            str, 'all', "Index of the CPU to decode, or 'all'"),
    }),
]


class ConfigError(ValueError):
    """A configuration value is invalid."""


def expand_all(path):
    """Expand both: envvars and ~ in `path`."""
    return os.path.expandvars(os.path.expanduser(path))


def search_configs(name=CONFIG_FILENAME):
    """
    Return the well known config locations that have a `name` file in
    them, highest priority first.
    """
    found = []
    logger.debug("Searching for %s files...", name)
    for sdir in SEARCH_DIRS:
        config = expand_all(os.path.join(sdir, name))
        if os.path.exists(config):
            found.append(config)
        else:
            logger.debug("not found in %s", sdir)
    return found


def _to_bool(value):
    states = ConfigParser.BOOLEAN_STATES
    if value.lower() not in states:
        raise ValueError("not a boolean: {!r}".format(value))
    return states[value.lower()]


class Configuration:
    """
    cpuid-decoder configuration.

    Every variable of :data:`CONFIG_SPEC` starts with its default value;
    values read from files are converted to the kind of the variable and
    checked.
    """

    def __init__(self, source=None):
        self.sections = OrderedDict()
        self._origins = dict()
        self._sources = [source] if source else []
        for section, contents in CONFIG_SPEC:
            self.sections[section] = OrderedDict()
            self._origins[section] = dict()
            for name, spec in sorted(contents.items()):
                self.sections[section][name] = spec.default
                self._origins[section][name] = ''

    @property
    def sources(self):
        """Return list of sources for this configuration."""
        return self._sources

    @property
    def output_format(self):
        return self.get_value('output', 'format')

    @property
    def show_uarch(self):
        return self.get_value('output', 'show_uarch')

    @property
    def show_amd_model(self):
        return self.get_value('output', 'show_amd_model')

    @property
    def cpu(self):
        """Index of the CPU to decode or ``None`` for all of them."""
        value = self.get_value('decode', 'cpu')
        if value == 'all':
            return None
        return int(value)

    def get_value(self, section, name):
        """Return a value of given `name` from given `section`."""
        return self.sections[section][name]

    def get_origin(self, section, name):
        """Return origin of the value."""
        return self._origins[section][name]

    def set_value(self, section, name, value, origin):
        """
        Set a value from its text form, raising :class:`ConfigError` when
        it does not convert or validate.
        """
        spec = dict(CONFIG_SPEC)[section][name]
        try:
            if spec.kind is bool:
                value = _to_bool(value)
            else:
                value = spec.kind(value)
        except ValueError as exc:
            raise ConfigError("[{}] {}: {} (origin: {})".format(
                section, name, exc, origin)) from exc
        self._validate(section, name, value, origin)
        self.sections[section][name] = value
        self._origins[section][name] = origin

    def _validate(self, section, name, value, origin):
        if (section, name) == ('output', 'format') \
                and value not in OUTPUT_FORMATS:
            raise ConfigError(
                "[output] format: {!r} is not one of {} (origin: {})".format(
                    value, ", ".join(OUTPUT_FORMATS), origin))
        if (section, name) == ('decode', 'cpu') and value != 'all':
            if not value.isdigit():
                raise ConfigError(
                    "[decode] cpu: {!r} is neither 'all' nor a CPU index"
                    " (origin: {})".format(value, origin))

    def update_from_another(self, configuration, origin):
        """
        Update this configuration with values from `configuration`.

        Only the values that are not defaults from 'configuration` are taken
        into account.
        """
        for section, variables in configuration.sections.items():
            for name in variables.keys():
                new_origin = configuration.get_origin(section, name)
                if new_origin:
                    self.sections[section][name] = configuration.get_value(
                        section, name)
                    self._origins[section][name] = origin or new_origin
        self._sources += configuration.sources

    @classmethod
    def from_text(cls, text, origin):
        """Create a new configuration with values from a string."""
        cfg = Configuration(origin)
        parser = ConfigParser(delimiters='=', interpolation=None)
        try:
            parser.read_string(text, source=origin)
        except ConfigParserError as exc:
            raise ConfigError(str(exc)) from exc
        known = dict(CONFIG_SPEC)
        for sect_name, section in parser.items():
            if sect_name == 'DEFAULT':
                continue
            if sect_name not in known:
                logger.debug("Ignoring unexpected section [%s]. Origin: %s",
                             sect_name, origin)
                continue
            for var_name, var in section.items():
                if var_name not in known[sect_name]:
                    logger.debug(
                        "Ignoring unexpected variable '%s' in section [%s]."
                        " Origin: %s", var_name, sect_name, origin)
                    continue
                cfg.set_value(sect_name, var_name, var, origin)
        return cfg

    @classmethod
    def from_path(cls, path):
        """Create a new configuration with values stored in a file at path."""
        if not os.path.isfile(path):
            raise ConfigError("{} file not found".format(path))
        with open(path, 'rt', encoding='UTF-8') as ini_file:
            return cls.from_text(ini_file.read(), path)


def load_config(path=None):
    """
    Read the configuration.

    With ``path`` only that file is read. Otherwise every
    ``cpuid-decoder.conf`` on the search path is applied, the ones with the
    highest priority last.
    """
    cfg = Configuration()
    if path:
        paths = [expand_all(path)]
    else:
        paths = search_configs()
    for source in reversed(paths):
        logger.debug("Applying %s", source)
        cfg.update_from_another(
            Configuration.from_path(source), "config file: {}".format(source))
    return cfg
