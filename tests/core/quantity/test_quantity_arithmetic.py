import math
from decimal import Decimal
from fractions import Fraction

import pytest

from dimensional.core.errors import DimensionMismatch, InexactRoot
from dimensional.core.literals import parse_rational
from dimensional.core.quantity import Quantity, cbrt, common_scale, sqrt
from dimensional.core.rational import Rational, make_rational
from dimensional.core.unit import Unit, scaled
from dimensional.units import si

m, kg, s, g = si.m, si.kg, si.s, si.g
km = scaled(1000, m, "km")
mm = scaled(make_rational(1, 1000), m, "mm")
inch = scaled(make_rational(127, 5), mm, "in")


# -------------------------------
# Common scale
# -------------------------------

@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Rational(1), make_rational(1, 1000), make_rational(1, 1000)),
        (Rational(60), Rational(3600), Rational(60)),
        (make_rational(1, 1000), make_rational(127, 5000), make_rational(1, 5000)),
        (Rational(6), Rational(4), Rational(2)),
        (make_rational(2, 3), make_rational(3, 4), make_rational(1, 12)),
    ],
)
def test_common_scale(a, b, expected):
    c = common_scale(a, b)
    assert c == expected
    assert (a / c).denominator == 1 and (b / c).denominator == 1


# -------------------------------
# Heterogeneous addition & subtraction
# -------------------------------

def test_kilogram_minus_gram_is_computed_in_grams():
    q = 1 * kg - 1 * g
    assert q.value == 999 and isinstance(q.value, int)
    assert q.unit is g


def test_float_payload_stays_float():
    q = 1.0 * kg - 1 * g
    assert q.value == 999.0 and isinstance(q.value, float)
    assert q.unit == g


def test_millimetre_plus_inch_uses_fifths_of_a_millimetre():
    q = 1 * mm + 1 * inch
    assert q.value == 132
    assert q.unit == make_rational(1, 5) * mm
    assert q.unit.scale == make_rational(1, 5000)


def test_common_unit_prefers_existing_operand_unit():
    q = 1 * si.minute + 1 * si.hour
    assert q.value == 61
    assert q.unit is si.minute


def test_same_unit_fast_path():
    q = 2 * m + 3 * m
    assert q.value == 5 and q.unit is m


def test_negative_scale_unit():
    backwards = Unit(si.LENGTH, -1, "bm")
    q = 1 * backwards + 1 * m
    assert q.value == 0
    assert q.unit == m


def test_dimension_mismatch_rejected():
    a, b = 1 * m, 1 * kg
    with pytest.raises(DimensionMismatch) as excinfo:
        _ = a + b
    assert isinstance(excinfo.value, TypeError)
    assert "add" in str(excinfo.value)
    assert a.value == 1 and b.value == 1
    with pytest.raises(DimensionMismatch):
        _ = a - b


def test_adding_plain_number_is_a_type_error():
    with pytest.raises(TypeError):
        _ = (1 * m) + 1


# -------------------------------
# Compound assignment keeps the left unit
# -------------------------------

def test_iadd_converts_back_to_left_unit():
    q = 1 * kg
    q += 1 * g
    assert q.unit is kg
    assert q.value == Fraction(1001, 1000)


def test_isub_integral_result_stays_int():
    q = 2 * km
    q -= 500 * m
    assert q.unit is km
    assert q.value == Fraction(3, 2)

    q = 2 * km
    q -= 1000 * m
    assert q.value == 1 and isinstance(q.value, int)


def test_iadd_mismatch_raises():
    q = 1 * m
    with pytest.raises(DimensionMismatch):
        q += 1 * s


# -------------------------------
# Multiplication, division, scalars
# -------------------------------

def test_scalar_multiplication_and_division():
    q = 2 * m
    assert (q * 3).value == 6
    assert (3 * q).value == 6
    assert (q / 2).value == 1.0
    assert (q * 3).unit is m


def test_quantity_times_quantity():
    q = (2 * m) * (3 * s)
    assert q.value == 6
    assert q.dim == si.LENGTH * si.TIME
    assert q.unit.name == "m·s"


def test_quantity_div_quantity():
    q = (10 * m) / (4 * s)
    assert q.value == 2.5
    assert q.unit.name == "m/s"


def test_mixed_scale_product_keeps_exact_scale():
    q = (3 * km) * (2 * g)
    assert q.value == 6
    assert q.unit.scale == 1
    assert q.dim == si.LENGTH * si.MASS


def test_quantity_with_unit_and_rational():
    q = (3 * m) * s
    assert q.value == 3 and q.unit == m * s
    q = s * (3 * m)
    assert q.unit.dim == si.TIME * si.LENGTH
    q = (3 * m) * Rational(1000)
    assert q.value == 3 and q.unit.scale == 1000
    q = (3 * m) / Rational(1000)
    assert q.unit.scale == make_rational(1, 1000)


def test_number_divided_by_quantity():
    q = 1 / (2 * s)
    assert q.value == 0.5
    assert q.unit == s ** -1


def test_literal_scaled_force_unit():
    kgf_ish = parse_rational("9.8") * (kg * m / s ** 2)
    assert kgf_ish.scale == make_rational(49, 5)
    assert kgf_ish.dim == si.FORCE


def test_neg_pos_abs():
    q = -3 * m
    assert (-q).value == 3
    assert (+q) is q
    assert abs(q).value == 3


# -------------------------------
# Powers & roots
# -------------------------------

def test_integer_power():
    q = (3 * km) ** 2
    assert q.value == 9
    assert q.unit.scale == 1_000_000
    assert q.unit.name == "km²"


def test_rational_power_checks_unit_first():
    q = (4 * m ** 2) ** make_rational(1, 2)
    assert q.value == 2.0
    assert q.unit == m
    with pytest.raises(InexactRoot):
        (4 * km) ** make_rational(1, 2)


def test_sqrt_and_cbrt():
    assert (9 * m ** 2).sqrt().value == 3.0
    assert sqrt(9 * m ** 2).unit == m
    d = sqrt(Decimal(16) * m ** 2)
    assert d.value == Decimal(4) and isinstance(d.value, Decimal)
    assert math.isclose(cbrt(-27 * m ** 3).value, -3.0)
    assert cbrt(27 * m ** 3).unit == m
    with pytest.raises(InexactRoot):
        sqrt(2 * scaled(2, m ** 2))


def test_decimal_payload_roots():
    c = cbrt(Decimal(-27) * m ** 3)
    assert isinstance(c.value, Decimal)
    assert math.isclose(c.value, -3)
    assert c.unit == m
    p = (Decimal(8) * m ** 3) ** make_rational(2, 3)
    assert isinstance(p.value, Decimal)
    assert math.isclose(p.value, 4)
    assert p.unit == m ** 2


@pytest.mark.regression(reason="a float exponent with a huge exact denominator must fail fast")
@pytest.mark.parametrize("exponent", [0.1, 0.3, 1 / 3])
def test_non_dyadic_float_exponent_is_inexact(exponent):
    with pytest.raises(InexactRoot):
        Unit(si.LENGTH, 1000) ** exponent
    with pytest.raises(InexactRoot):
        (2 * km) ** exponent


def test_float_exponent_exact_when_dyadic():
    q = (4 * m ** 2) ** 0.5
    assert q.unit == m
    assert q.value == 2.0


def test_sqrt_dispatch_on_plain_values():
    assert sqrt(make_rational(9, 4)) == make_rational(3, 2)
    assert sqrt(16.0) == 4.0
    assert math.isclose(cbrt(8.0), 2.0)


def test_pythagorean_quantities():
    side = sqrt((3 * m) ** 2 + (4 * m) ** 2)
    assert side.value == 5.0 and side.unit == m


def test_modulo_pow_rejected():
    with pytest.raises(TypeError):
        pow(2 * m, 2, 3)


def test_quantity_requires_numeric_payload():
    with pytest.raises(TypeError):
        Quantity("1", m)
    with pytest.raises(TypeError):
        Quantity(1, "m")
    with pytest.raises(TypeError):
        Quantity(1 * m, m)
