# dimensional.core.dimensions

from __future__ import annotations

import itertools
import math
from fractions import Fraction
from typing import Any, Iterable, NamedTuple, Tuple, TypeAlias, Union

from dimensional.core.rational import Rational, as_rational

# --- Tags --------------------------------------------------------------------

_TAG_IDS = itertools.count()


class DimensionTag:
    """
    Opaque identity of one fundamental dimension (length, mass, ...).

    Identity is the object itself: two tags created with the same name are
    still different dimensions. The serial id only fixes a canonical order.
    """

    __slots__ = ("name", "id")

    def __init__(self, name: str) -> None:
        self.name = name
        self.id = next(_TAG_IDS)

    def __repr__(self) -> str:
        return f"DimensionTag({self.name!r})"

    def __copy__(self) -> "DimensionTag":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "DimensionTag":
        return self

    def __reduce__(self) -> Any:
        # unpickling would mint a second, unrelated identity
        raise TypeError("DimensionTag identities cannot be pickled")


class DimensionFactor(NamedTuple):
    """A single exponentiated dimension, e.g. ``time^-2``."""

    tag: DimensionTag
    exponent: Rational


Exponent: TypeAlias = Union[Rational, int, Fraction, float]
DimLike = Union["Dimension", Iterable[Tuple[DimensionTag, Exponent]]]


def _exact_exponent(n: Any) -> Rational:
    if isinstance(n, float):
        if not math.isfinite(n):
            raise ValueError(f"Exponent must be finite, got {n!r}")
        return Rational.from_value(n)
    if not isinstance(n, (int, Fraction, Rational)):
        raise TypeError(
            f"Exponent must be int, float, Fraction or Rational, got {type(n).__name__}"
        )
    return as_rational(n)


# --- Core object -------------------------------------------------------------

class Dimension(tuple):
    """
    Immutable canonical set of dimension factors.

    Factors are sorted by tag id, each tag appears at most once and zero
    exponents are pruned, so equality is insensitive to composition order.
    Tuple subclass => hashable and usable as a dict key.
    """

    __slots__ = ()

    def __new__(cls, factors: DimLike = ()) -> "Dimension":
        if isinstance(factors, Dimension):
            return factors

        # a repeated tag is merged, never duplicated
        merged: dict[DimensionTag, Rational] = {}
        for tag, exponent in factors:
            if not isinstance(tag, DimensionTag):
                raise TypeError(f"Expected DimensionTag, got {type(tag).__name__}")
            merged[tag] = merged.get(tag, Rational(0)) + _exact_exponent(exponent)

        canonical = sorted(
            (DimensionFactor(tag, exp) for tag, exp in merged.items() if exp != 0),
            key=lambda f: f.tag.id,
        )
        return tuple.__new__(cls, canonical)

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: DimLike) -> "Dimension":  # type: ignore[override]
        o = Dimension(other)
        return Dimension(itertools.chain(self, o))

    def __truediv__(self, other: DimLike) -> "Dimension":
        return self * (Dimension(other) ** -1)

    def __rtruediv__(self, other: DimLike) -> "Dimension":
        return Dimension(other) / self

    def __pow__(self, n: Exponent, modulo: Any | None = None) -> "Dimension":
        # Python may call __pow__ with a third arg (modulo); reject it explicitly
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Dimension.")
        p = _exact_exponent(n)
        return Dimension((f.tag, f.exponent * p) for f in self)

    def __rmul__(self, other: Any) -> "Dimension":
        """Prevent (int * Dimension) from falling back to tuple repetition."""
        return NotImplemented

    def __add__(self, other: Any) -> "Dimension":
        """Block tuple concatenation (e.g., LENGTH + MASS)."""
        return NotImplemented

    def __radd__(self, other: Any) -> "Dimension":
        return NotImplemented

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return len(self) == 0

    @property
    def tags(self) -> tuple[DimensionTag, ...]:
        return tuple(f.tag for f in self)

    def exponent(self, tag: DimensionTag) -> Rational:
        for f in self:
            if f.tag is tag:
                return f.exponent
        return Rational(0)

    def __repr__(self) -> str:
        if not self:
            return "[1]"
        parts = ""
        for tag, exp in self:
            e = str(exp) if exp.denominator == 1 else f"({exp})"
            parts += f"[{tag.name}^{e}]"
        return parts


# --- Constructors ------------------------------------------------------------

def dimension(tag: DimensionTag) -> Dimension:
    """The dimension made of ``tag`` alone, with exponent 1."""
    return Dimension(((tag, 1),))


def base_dimension(name: str) -> Dimension:
    """Create a brand new fundamental dimension."""
    return dimension(DimensionTag(name))


# --- Function shims ----------------------------------------------------------

def dim_mul(a: DimLike, b: DimLike) -> Dimension:
    return Dimension(a) * b


def dim_div(a: DimLike, b: DimLike) -> Dimension:
    return Dimension(a) / b


def dim_pow(a: DimLike, n: Exponent) -> Dimension:
    return Dimension(a) ** n


DIMENSIONLESS: Dimension = Dimension()

__all__ = [
    "DimensionTag",
    "DimensionFactor",
    "Dimension",
    "DimLike",
    "dimension",
    "base_dimension",
    "dim_mul",
    "dim_div",
    "dim_pow",
    "DIMENSIONLESS",
]
