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
:mod:`cpuid_decoder.predicates` -- disambiguating predicates
============================================================

Several shipped parts report exactly the same signature; the rule tables
tell them apart with the predicates defined here. A predicate is a pure
function of the :class:`~cpuid_decoder.stash.Stash`. Every input it reads
has been computed before matching starts, and information that was never
observed reads as ``False`` so the rule just does not match.

Predicates compose with ``&``, ``|`` and ``~``::

    desktop_celeron = is_intel & ~mobile & celeron
"""

from cpuid_decoder.vendor import Vendor


class Predicate:
    """
    A named boolean function of the stash.
    """

    __slots__ = ("name", "func")

    def __init__(self, name, func):
        self.name = name
        self.func = func

    def __call__(self, stash):
        return bool(self.func(stash))

    def __and__(self, other):
        return Predicate("({} & {})".format(self.name, other.name),
                         lambda stash: self(stash) and other(stash))

    def __or__(self, other):
        return Predicate("({} | {})".format(self.name, other.name),
                         lambda stash: self(stash) or other(stash))

    def __invert__(self):
        return Predicate("~{}".format(self.name),
                         lambda stash: not self(stash))

    def __repr__(self):
        return "<Predicate {}>".format(self.name)


def predicate(name):
    """
    Decorator turning a plain function of the stash into a Predicate.
    """
    def decorator(func):
        return Predicate(name, func)
    return decorator


def _vendor(vendor):
    return Predicate(vendor.name.lower(),
                     lambda stash: stash.vendor is vendor)


def _brand(flag):
    return Predicate(flag, lambda stash: getattr(stash.br, flag))


def _cache(flag):
    return Predicate(flag, lambda stash: getattr(stash.cache, flag))


def _cores(count):
    return Predicate("{}-core".format(count),
                     lambda stash: stash.br.cores == count)


is_intel = _vendor(Vendor.INTEL)
is_amd = _vendor(Vendor.AMD)
is_hygon = _vendor(Vendor.HYGON)
is_via = _vendor(Vendor.VIA)
mobile = _brand("mobile")


# ---------------------------------------------------------------------------
# Intel
# ---------------------------------------------------------------------------

celeron = _brand("celeron")
core = _brand("core")
pentium = _brand("pentium")
atom = _brand("atom")
xeon = _brand("xeon")
xeon_mp = _brand("xeon_mp")
pentium_m = _brand("pentium_m")
pentium_d = _brand("pentium_d")
extreme = _brand("extreme")
generic = _brand("generic")
scalable = _brand("scalable")
u_line = _brand("u_line")
y_line = _brand("y_line")
g_line = _brand("g_line")
i_8000 = _brand("i_8000")
i_10000 = _brand("i_10000")
cc150 = _brand("cc150")

l2_4w_256k = _cache("l2_4w_256k")
l2_4w_512k = _cache("l2_4w_512k")
l2_4w_1m_or_2m = _cache("l2_4w_1m_or_2m")
l2_8w_256k = _cache("l2_8w_256k")
l2_8w_512k = _cache("l2_8w_512k")
l2_8w_1m_or_2m = _cache("l2_8w_1m_or_2m")
l2_256k = _cache("l2_256k")
l2_512k = _cache("l2_512k")
l2_2m = _cache("l2_2m")
l2_6m = _cache("l2_6m")
l3 = _cache("l3")


@predicate("no-l2")
def no_l2(stash):
    return stash.cache.l2_size_kb == 0


@predicate("l2-128k")
def l2_128k(stash):
    return stash.cache.l2_size_kb == 128


desktop_celeron = is_intel & ~mobile & celeron
mobile_celeron = is_intel & mobile & celeron
desktop_pentium = is_intel & ~mobile & pentium & ~celeron
mobile_pentium = is_intel & mobile & pentium
desktop_core = is_intel & ~mobile & core
mobile_core = is_intel & mobile & core
desktop_atom = is_intel & ~mobile & atom
mobile_atom = is_intel & mobile & atom
intel_xeon = is_intel & xeon
intel_xeon_mp = is_intel & xeon_mp
intel_pentium_m = is_intel & pentium_m
intel_pentium_d = is_intel & pentium_d
intel_extreme = is_intel & extreme
intel_generic = is_intel & generic
intel_scalable = is_intel & xeon & scalable
intel_u_line = is_intel & u_line
intel_y_line = is_intel & y_line
intel_g_line = is_intel & g_line
intel_i_8000 = is_intel & i_8000
intel_i_10000 = is_intel & i_10000
intel_cc150 = is_intel & cc150

# Pentium II and III era parts carry no brand string; the L2 geometry from
# leaf 2 tells the Celeron, desktop and Xeon dies apart.
p6_celeron = is_intel & (no_l2 | l2_128k | celeron)
p6_pentium = is_intel & (l2_4w_512k | l2_8w_256k | l2_8w_512k) \
    & ~celeron & ~xeon
p6_xeon = is_intel & (l2_4w_1m_or_2m | l2_8w_1m_or_2m | xeon)
netburst_xeon_l3 = is_intel & xeon & l3


# ---------------------------------------------------------------------------
# AMD and Hygon
# ---------------------------------------------------------------------------

athlon = _brand("athlon")
athlon_lv = _brand("athlon_lv")
athlon_xp = _brand("athlon_xp")
athlon_fx = _brand("athlon_fx")
athlon_mp = _brand("athlon_mp")
duron = _brand("duron")
duron_mp = _brand("duron_mp")
sempron = _brand("sempron")
opteron = _brand("opteron")
phenom = _brand("phenom")
turion = _brand("turion")
neo = _brand("neo")
series = _brand("series")
geode = _brand("geode")
fx = _brand("fx")
firepro = _brand("firepro")
ultra = _brand("ultra")
t_suffix = _brand("t_suffix")
ryzen = _brand("ryzen")
epyc = _brand("epyc")
epyc_3000 = _brand("epyc_3000")
embedded = _brand("embedded")


@predicate("l2-64k")
def l2_64k(stash):
    return stash.cache.l2_size_kb == 64


@predicate("l2-256k-or-less")
def l2_256k_or_less(stash):
    return 0 < stash.cache.l2_size_kb <= 256


desktop_athlon = is_amd & ~mobile & athlon
mobile_athlon = is_amd & mobile & athlon
desktop_athlon_xp = is_amd & ~mobile & athlon_xp
mobile_athlon_xp = is_amd & mobile & athlon_xp
amd_athlon_lv = is_amd & athlon_lv
amd_athlon_fx = is_amd & athlon_fx
amd_athlon_mp = is_amd & athlon_mp
desktop_duron = is_amd & ~mobile & duron
mobile_duron = is_amd & mobile & duron
amd_duron_mp = is_amd & duron_mp
desktop_sempron = is_amd & ~mobile & sempron
mobile_sempron = is_amd & mobile & sempron
amd_opteron = is_amd & opteron
dual_core_opteron = is_amd & opteron & _cores(2)
quad_core_opteron = is_amd & opteron & _cores(4)
six_core_opteron = is_amd & opteron & _cores(6)
eight_core_opteron = is_amd & opteron & _cores(8)
twelve_core_opteron = is_amd & opteron & _cores(12)
sixteen_core_opteron = is_amd & opteron & _cores(16)
amd_phenom = is_amd & phenom
amd_turion = is_amd & turion
amd_neo = is_amd & neo
amd_series = is_amd & series
amd_geode = is_amd & geode
amd_fx = is_amd & fx
amd_firepro = is_amd & firepro
amd_ultra = is_amd & ultra
amd_t_suffix = is_amd & t_suffix
desktop_ryzen = is_amd & ~mobile & ryzen
mobile_ryzen = is_amd & mobile & ryzen
amd_ryzen = is_amd & ryzen
amd_epyc = is_amd & epyc
amd_epyc_3000 = is_amd & epyc_3000
amd_embedded = is_amd & embedded
dual_core = is_amd & _cores(2)
triple_core = is_amd & _cores(3)
quad_core = is_amd & _cores(4)
six_core = is_amd & _cores(6)
eight_core = is_amd & _cores(8)
k7_duron_l2 = is_amd & l2_64k
amd_small_l2 = is_amd & l2_256k_or_less
hygon_server = is_hygon & _brand("hygon_server")


# ---------------------------------------------------------------------------
# VIA
# ---------------------------------------------------------------------------

via_c7_m = is_via & _brand("c7_m")
via_eden = is_via & _brand("eden")
via_nano = is_via & _brand("nano")
