import pytest

from dimensional.core.dimensions import DIMENSIONLESS
from dimensional.core.quantity import Quantity
from dimensional.core.unit import UNITLESS


@pytest.mark.regression(reason="every unit divided by itself must give a bare number")
def test_all_units_self_division_is_dimensionless_and_nameless(reg):
    for name, unit in reg.all().items():
        q = Quantity(1, unit)
        result = q / q

        assert result.dim == DIMENSIONLESS, f"{name}: expected dimensionless, got {result.dim!r}"
        assert result.unit == UNITLESS, f"{name}: expected unit scale 1, got {result.unit.scale}"
        assert result.unit.name == "", f"{name}: expected unit name '', got '{result.unit.name}'"
        assert repr(result) == "1", f"{name}: expected numeric-only repr, got '{repr(result)}'"


@pytest.mark.regression(reason="dimensionless ratios of scaled units must reduce to the right number")
@pytest.mark.parametrize("sym_a, val_a, sym_b, val_b, expected", [
    ("m", 3, "cm", 5, 60),
    ("s", 7, "ms", 2, 3500),
    ("g", 1, "kg", 2, 0.0005),
    ("N", 10, "uN", 5, 2_000_000),
    ("Pa", 3, "kPa", 3, 0.001),
    ("Hz", 5, "kHz", 1, 0.005),
])
def test_dimensionless_ratio_reduces_exactly(reg, sym_a, val_a, sym_b, val_b, expected):
    r = (val_a * reg.get(sym_a)) / (val_b * reg.get(sym_b))

    assert r.dim.is_dimensionless
    assert r.to_reference().value == pytest.approx(expected)
    assert r.to(1).unit == UNITLESS


def test_unitless_quantities_add(reg):
    ratio = (1 * reg.get("km")) / (1 * reg.get("m"))
    total = ratio + Quantity(1)
    assert total.to(1).value == pytest.approx(1001)
