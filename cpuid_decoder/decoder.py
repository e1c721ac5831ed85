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
:mod:`cpuid_decoder.decoder` -- processor identification
========================================================

Tie the pieces together: match the model name and microarchitecture
tables of the vendor against a built stash, rebuild the AMD model number
and put the final text together.
"""

from collections import namedtuple
import logging

from cpuid_decoder.amd_model import decode_amd_model
from cpuid_decoder.rules import NO_ARCH, match
from cpuid_decoder.stash import build_stash
from cpuid_decoder.tables import synth_table, uarch_table
from cpuid_decoder.vendor import Vendor, hypervisor_name, vendor_name


logger = logging.getLogger(__name__)

DecodeResult = namedtuple(
    "DecodeResult",
    "vendor_name synth model arch amd_model brand hypervisor mp widths")
DecodeResult.__doc__ = """
Everything decoded about one CPU.

``synth`` is the model text with the AMD model number and the
microarchitecture annotation applied; ``model`` is the bare table text.
Both are ``None`` for vendors without tables.
"""


def annotate(text, arch):
    """
    Append the microarchitecture annotation to ``text``.

    The uarch goes in brackets unless the text already names it as the
    core, the family label goes in braces unless the text already has it
    and the process node follows a comma.
    """
    if not arch:
        return text
    # Only the model text itself decides what is already implied
    suffix = ""
    if arch.uarch and not (arch.core_is_uarch and arch.uarch in text):
        suffix += " [{}]".format(arch.uarch)
    if arch.family and arch.family not in text:
        suffix += " {{{}}}".format(arch.family)
    if arch.phys:
        suffix += ", {}".format(arch.phys)
    return text + suffix


def amd_model_number(stash):
    """
    The AMD or Hygon model number rebuilt from the brand ID fields, or
    ``None``.
    """
    if stash.vendor not in (Vendor.AMD, Vendor.HYGON):
        return None
    model = decode_amd_model(stash)
    if model is None or not model.proc:
        return None
    return model.proc


def decode(stash, show_uarch=True, show_amd_model=True):
    """
    Decode a built :class:`~cpuid_decoder.stash.Stash`.

    :param show_uarch:
        append the microarchitecture annotation to ``synth``
    :param show_amd_model:
        append the AMD model number to ``synth``
    :returns: a :class:`DecodeResult`
    """
    key = stash.key
    model = None
    synth = None
    arch = NO_ARCH
    amd_model = None
    table = synth_table(stash.vendor)
    if table is not None:
        model = match(table, key, stash)
        synth = model
        amd_model = amd_model_number(stash)
        if amd_model and show_amd_model:
            synth = "{} {}".format(synth, amd_model)
        table = uarch_table(stash.vendor)
        if table is not None:
            arch = match(table, key, stash)
        if show_uarch:
            synth = annotate(synth, arch)
    else:
        logger.debug("no tables for vendor %s", stash.vendor.name)
    return DecodeResult(
        vendor_name=vendor_name(stash.vendor),
        synth=synth,
        model=model,
        arch=arch,
        amd_model=amd_model,
        brand=stash.effective_brand,
        hypervisor=hypervisor_name(stash.hypervisor),
        mp=stash.mp,
        widths=stash.widths)


def decode_dump(leaf_dump, **options):
    """
    Build the stash of ``leaf_dump`` and decode it.

    Returns a ``(stash, result)`` pair; ``options`` are passed to
    :func:`decode`.
    """
    stash = build_stash(leaf_dump)
    return stash, decode(stash, **options)
