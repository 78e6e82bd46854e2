"""
dimensional.units.si
====================

Système International d'unités: named dimensions, units and prefixes.

Everything here is plain data built with the public core API; the algebra
treats these dimensions exactly like any user-created
:func:`~dimensional.core.dimensions.base_dimension`.
"""

from __future__ import annotations

from dimensional.core.dimensions import DIMENSIONLESS, base_dimension
from dimensional.core.rational import make_rational
from dimensional.core.unit import Unit, scaled, unit_of
from dimensional.units.prefixes import PREFIXES_BY_NAME

# --- Dimensions --------------------------------------------------------------

LENGTH = base_dimension("length")
MASS = base_dimension("mass")
TIME = base_dimension("time")
CHARGE = base_dimension("charge")
TEMPERATURE = base_dimension("temperature")
SUBSTANCE = base_dimension("substance")
LUMINOUS_INTENSITY = base_dimension("luminous intensity")

CURRENT = CHARGE / TIME
FORCE = MASS * LENGTH / TIME ** 2
ENERGY = FORCE * LENGTH
POTENTIAL = ENERGY / CHARGE
POWER = ENERGY / TIME
PRESSURE = FORCE / LENGTH ** 2
VOLUME = LENGTH ** 3
FLOW = VOLUME / TIME
FREQUENCY = TIME ** -1

# --- Base units --------------------------------------------------------------

m = metre = unit_of(LENGTH, "m")
kg = kilogram = unit_of(MASS, "kg")
s = second = unit_of(TIME, "s")
A = ampere = unit_of(CURRENT, "A")
K = kelvin = unit_of(TEMPERATURE, "K")
mol = mole = unit_of(SUBSTANCE, "mol")
cd = candela = unit_of(LUMINOUS_INTENSITY, "cd")

# --- Derived units -----------------------------------------------------------

rad = radian = (m / m).named("rad")
sr = steradian = (m ** 2 / m ** 2).named("sr")
Hz = hertz = (1 / s).named("Hz")
N = newton = (kg * m / s ** 2).named("N")
Pa = pascal = (N / m ** 2).named("Pa")
J = joule = (N * m).named("J")
W = watt = (J / s).named("W")
C = coulomb = (s * A).named("C")
V = volt = (W / A).named("V")
F = farad = (C / V).named("F")
ohm = (V / A).named("Ω")
S = siemens = (A / V).named("S")
Wb = weber = (V * s).named("Wb")
T = tesla = (Wb / m ** 2).named("T")
H = henry = (Wb / A).named("H")
degC = degree_celsius = K.named("degC")
lm = lumen = (cd * sr).named("lm")
lx = lux = (lm / m ** 2).named("lx")
Bq = becquerel = (1 / s).named("Bq")
Gy = gray = (J / kg).named("Gy")
Sv = sievert = (J / kg).named("Sv")
kat = katal = (mol / s).named("kat")

# --- Convenience -------------------------------------------------------------

g = gram = scaled(make_rational(1, 1000), kg, "g")
minute = scaled(60, s, "min")
hour = scaled(60, minute, "h")
day = scaled(24, hour, "d")
L = litre = scaled(make_rational(1, 1000), m ** 3, "L")

# --- Prefixes (exact Rationals) ---------------------------------------------

yotta = PREFIXES_BY_NAME["yotta"].factor
zetta = PREFIXES_BY_NAME["zetta"].factor
exa = PREFIXES_BY_NAME["exa"].factor
peta = PREFIXES_BY_NAME["peta"].factor
tera = PREFIXES_BY_NAME["tera"].factor
giga = PREFIXES_BY_NAME["giga"].factor
mega = PREFIXES_BY_NAME["mega"].factor
kilo = PREFIXES_BY_NAME["kilo"].factor
hecto = PREFIXES_BY_NAME["hecto"].factor
deca = PREFIXES_BY_NAME["deca"].factor
deci = PREFIXES_BY_NAME["deci"].factor
centi = PREFIXES_BY_NAME["centi"].factor
milli = PREFIXES_BY_NAME["milli"].factor
micro = PREFIXES_BY_NAME["micro"].factor
nano = PREFIXES_BY_NAME["nano"].factor
pico = PREFIXES_BY_NAME["pico"].factor
femto = PREFIXES_BY_NAME["femto"].factor
atto = PREFIXES_BY_NAME["atto"].factor
zepto = PREFIXES_BY_NAME["zepto"].factor
yocto = PREFIXES_BY_NAME["yocto"].factor

BASE_UNITS: tuple[Unit, ...] = (m, kg, s, A, K, mol, cd)

DERIVED_UNITS: tuple[Unit, ...] = (
    rad, sr, Hz, N, Pa, J, W, C, V, F, ohm, S, Wb, T, H, degC, lm, lx, Bq, Gy, Sv, kat,
)

CONVENIENCE_UNITS: tuple[Unit, ...] = (g, minute, hour, day, L)

__all__ = [
    "DIMENSIONLESS",
    "LENGTH",
    "MASS",
    "TIME",
    "CHARGE",
    "TEMPERATURE",
    "SUBSTANCE",
    "LUMINOUS_INTENSITY",
    "CURRENT",
    "FORCE",
    "ENERGY",
    "POTENTIAL",
    "POWER",
    "PRESSURE",
    "VOLUME",
    "FLOW",
    "FREQUENCY",
    "BASE_UNITS",
    "DERIVED_UNITS",
    "CONVENIENCE_UNITS",
]
