from fractions import Fraction

import pytest

from dimensional.core.quantity import Quantity
from dimensional.core.rational import make_rational
from dimensional.core.unit import Unit, scaled
from dimensional.units import si

m, s, g = si.m, si.s, si.g
km = scaled(1000, m, "km")


@pytest.mark.parametrize(
    "q, expected",
    [
        (999 * g, "999 g"),
        (Fraction(3, 2) * km, "3/2 km"),
        (2.5 * m / s, "2.5 m/s"),
        (Quantity(5), "5"),
        (0.1 * m, "0.1 m"),
        (3 * Unit(si.LENGTH, make_rational(1, 5000)), "3 1/5000·length"),
    ],
)
def test_repr(q, expected):
    assert repr(q) == expected


def test_derived_name_in_repr():
    q = (2 * si.kg) * (3 * m) / (1 * s) ** 2
    assert repr(q) == "6 kg·m/s²"


def test_format_native_and_ref():
    q = 2 * km
    assert f"{q}" == "2 km"
    assert f"{q:native}" == "2 km"
    assert f"{q:ref}" == "2000 length"


def test_format_numeric_spec():
    assert f"{2.5 * km:.2f}" == "2.50 km"
    assert f"{Quantity(0.125):.1%}" == "12.5%"


def test_str_matches_repr():
    q = 7 * g
    assert str(q) == repr(q)
