import copy
import pickle
from fractions import Fraction

import pytest

from dimensional.core.dimensions import (
    DIMENSIONLESS,
    Dimension,
    DimensionTag,
    base_dimension,
    dim_div,
    dim_mul,
    dim_pow,
    dimension,
)
from dimensional.core.rational import make_rational


@pytest.fixture()
def tags():
    return DimensionTag("length"), DimensionTag("mass"), DimensionTag("time")


def test_dimension_of_tag_has_single_unit_factor(tags):
    L, _, _ = tags
    d = dimension(L)
    assert len(d) == 1
    assert d[0].tag is L and d[0].exponent == 1


def test_squaring_merges_into_one_factor(tags):
    L, _, _ = tags
    d = dimension(L) * dimension(L)
    assert len(d) == 1
    assert d.exponent(L) == 2


def test_multiplication_is_commutative_and_associative(tags):
    L, M, T = (dimension(t) for t in tags)
    assert L * M == M * L
    assert (L * M) * T == L * (M * T)
    assert (L / T) * M == M * (L / T)


def test_factors_are_sorted_by_tag_creation_order(tags):
    L, M, T = tags
    d = dimension(T) * dimension(L) * dimension(M)
    assert d.tags == (L, M, T)


def test_division_and_cancellation(tags):
    L, _, T = (dimension(t) for t in tags)
    speed = L / T
    assert speed.exponent(tags[2]) == -1
    assert (speed * T) == L
    assert (L / L) == DIMENSIONLESS
    assert (L / L).is_dimensionless


def test_rational_exponents(tags):
    L = dimension(tags[0])
    half = L ** make_rational(1, 2)
    assert half.exponent(tags[0]) == make_rational(1, 2)
    assert half * half == L
    assert L ** Fraction(3, 2) == L * half
    assert L ** 0.5 == half


def test_zero_power_is_dimensionless(tags):
    assert dimension(tags[0]) ** 0 == DIMENSIONLESS


def test_same_name_tags_are_different_dimensions():
    a = base_dimension("length")
    b = base_dimension("length")
    assert a != b
    assert (a / b) != DIMENSIONLESS


def test_constructor_merges_and_prunes(tags):
    L, M, _ = tags
    d = Dimension([(L, 1), (M, 2), (L, -1)])
    assert d.tags == (M,)
    assert d.exponent(L) == 0


def test_constructor_rejects_non_tags():
    with pytest.raises(TypeError):
        Dimension([("length", 1)])


def test_hashable_and_usable_as_key(tags):
    L, _, T = (dimension(t) for t in tags)
    lookup = {L / T: "speed"}
    assert lookup[dimension(tags[0]) * dimension(tags[2]) ** -1] == "speed"


def test_function_shims(tags):
    L, M, _ = (dimension(t) for t in tags)
    assert dim_mul(L, M) == L * M
    assert dim_div(L, M) == L / M
    assert dim_pow(L, 3) == L * L * L


def test_tuple_operators_are_blocked(tags):
    L, M, _ = (dimension(t) for t in tags)
    with pytest.raises(TypeError):
        _ = L + M
    with pytest.raises(TypeError):
        _ = 2 * L


def test_modulo_pow_rejected(tags):
    with pytest.raises(TypeError):
        pow(dimension(tags[0]), 2, 3)


def test_non_finite_exponent_rejected(tags):
    with pytest.raises(ValueError):
        dimension(tags[0]) ** float("nan")
    with pytest.raises(TypeError):
        dimension(tags[0]) ** "2"


def test_repr(tags):
    L, M, T = tags
    d = dimension(M) * dimension(L) ** 2 / dimension(T) ** 2
    assert repr(d) == "[length^2][mass^1][time^-2]"
    assert repr(DIMENSIONLESS) == "[1]"
    assert repr(dimension(L) ** make_rational(1, 2)) == "[length^(1/2)]"


def test_tags_keep_identity_when_copied(tags):
    L = tags[0]
    assert copy.copy(L) is L
    assert copy.deepcopy(L) is L


def test_tags_cannot_be_pickled(tags):
    with pytest.raises(TypeError):
        pickle.dumps(tags[0])
