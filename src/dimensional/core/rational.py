"""
dimensional.core.rational
=========================

Exact rational numbers used for unit scales and dimension exponents.

A :class:`Rational` is always stored in canonical form: the denominator is
positive and shares no factor with the numerator, and zero is ``0/1``.
Constructing a non-canonical pair directly is an error; use
:func:`make_rational` to reduce automatically.

Roots never fall back to floating point. ``iroot`` takes the root of the
numerator and the denominator separately and raises :class:`InexactRoot`
unless both are exact integers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Union

from dimensional.core.errors import DivisionByZero, InexactRoot

RationalLike = Union["Rational", int, Fraction]


@dataclass(frozen=True, slots=True, eq=False)
class Rational:
    """Canonical reduced fraction ``numerator / denominator``."""

    numerator: int = 0
    denominator: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.numerator, int) or not isinstance(self.denominator, int):
            raise TypeError("Rational numerator and denominator must be integers")
        if self.denominator == 0:
            raise DivisionByZero(f"bad denominator in {self.numerator}/0")
        if self.denominator < 0 or math.gcd(self.numerator, self.denominator) != 1:
            raise ValueError(
                f"Rational({self.numerator}, {self.denominator}) must be constructed in "
                "reduced form. Use make_rational to reduce automatically."
            )

    # --- Conversions ---
    @classmethod
    def from_value(cls, value: Any) -> Rational:
        """Exact conversion from int, Fraction, Decimal or a finite float."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"Cannot represent {value!r} as a Rational")
        if isinstance(value, (int, Fraction, float, Decimal)):
            f = Fraction(value)
            return cls(f.numerator, f.denominator)
        raise TypeError(f"Cannot convert {type(value).__name__} to Rational")

    def as_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def is_integer(self) -> bool:
        return self.denominator == 1

    def __int__(self) -> int:
        if self.denominator != 1:
            raise TypeError(
                f"{self} is not integral; divide numerator by denominator to truncate"
            )
        return self.numerator

    def __float__(self) -> float:
        return self.numerator / self.denominator

    def __bool__(self) -> bool:
        return self.numerator != 0

    # --- Arithmetic ---
    def __pos__(self) -> Rational:
        return self

    def __neg__(self) -> Rational:
        return Rational(-self.numerator, self.denominator)

    def __abs__(self) -> Rational:
        return Rational(abs(self.numerator), self.denominator)

    def __add__(self, other: Any) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return make_rational(
            self.numerator * o.denominator + o.numerator * self.denominator,
            self.denominator * o.denominator,
        )

    __radd__ = __add__

    def __sub__(self, other: Any) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self + (-o)

    def __rsub__(self, other: Any) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o + (-self)

    def __mul__(self, other: Any) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return make_rational(
            self.numerator * o.numerator, self.denominator * o.denominator
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        if o.numerator == 0:
            raise DivisionByZero(f"division of {self} by zero")
        return make_rational(
            self.numerator * o.denominator, self.denominator * o.numerator
        )

    def __rtruediv__(self, other: Any) -> Rational:
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def __lshift__(self, shift: Any) -> Rational:
        s = _coerce(shift)
        if s is None:
            return NotImplemented
        if s.denominator != 1:
            raise ValueError(f"non-integral shift by {s}")
        n = s.numerator
        if n >= 0:
            return self * (1 << n)
        return make_rational(self.numerator, self.denominator << -n)

    def __pow__(self, exponent: Any, modulo: Any | None = None) -> Rational:
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Rational.")
        e = _coerce(exponent)
        if e is None:
            return NotImplemented
        if e.denominator == 1:
            return ipow(self, e.numerator)
        # for reduced p/q, r**p has an exact q-th root iff r does
        return ipow(iroot(self, e.denominator), e.numerator)

    def __rpow__(self, base: Any) -> Rational:
        b = _coerce(base)
        if b is None:
            return NotImplemented
        return b ** self

    def sqrt(self) -> Rational:
        return iroot(self, 2)

    def cbrt(self) -> Rational:
        return iroot(self, 3)

    # --- Comparison ---
    def __eq__(self, other: object) -> bool:
        if isinstance(other, float):
            return self.as_fraction() == other
        o = _coerce(other)
        if o is None:
            return NotImplemented
        return self.numerator == o.numerator and self.denominator == o.denominator

    def __hash__(self) -> int:
        # same hash as int/Fraction of equal value
        return hash(Fraction(self.numerator, self.denominator))

    def _cross(self, other: Any) -> tuple[int, int] | None:
        o = _coerce(other)
        if o is None:
            return None
        return self.numerator * o.denominator, o.numerator * self.denominator

    def __lt__(self, other: Any) -> bool:
        c = self._cross(other)
        if c is None:
            return NotImplemented
        return c[0] < c[1]

    def __le__(self, other: Any) -> bool:
        c = self._cross(other)
        if c is None:
            return NotImplemented
        return c[0] <= c[1]

    def __gt__(self, other: Any) -> bool:
        c = self._cross(other)
        if c is None:
            return NotImplemented
        return c[0] > c[1]

    def __ge__(self, other: Any) -> bool:
        c = self._cross(other)
        if c is None:
            return NotImplemented
        return c[0] >= c[1]

    # --- Display ---
    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def _coerce(value: Any) -> Rational | None:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int):
        return Rational(int(value), 1)
    if isinstance(value, Fraction):
        return Rational(value.numerator, value.denominator)
    return None


def as_rational(value: RationalLike) -> Rational:
    """Coerce an int, Fraction or Rational; anything else is a TypeError."""
    r = _coerce(value)
    if r is None:
        raise TypeError(
            f"Expected an int, Fraction or Rational, got {type(value).__name__}"
        )
    return r


def make_rational(numerator: int = 0, denominator: int = 1) -> Rational:
    """Build a Rational from any integer pair, reducing it to canonical form."""
    if denominator == 0:
        raise DivisionByZero(f"bad denominator in {numerator}/0")
    g = math.gcd(numerator, denominator)
    if denominator < 0:
        g = -g
    return Rational(numerator // g, denominator // g)


def ipow(base: RationalLike, n: int) -> Rational:
    """Raise ``base`` to a signed integer power by repeated squaring."""
    b = as_rational(base)
    if n < 0:
        if b.numerator == 0:
            raise DivisionByZero("zero cannot be raised to a negative power")
        b = make_rational(b.denominator, b.numerator)
        n = -n

    num, den = 1, 1
    bn, bd = b.numerator, b.denominator
    while n:
        if n & 1:
            num *= bn
            den *= bd
        bn *= bn
        bd *= bd
        n >>= 1
    # powers of coprime integers stay coprime
    return Rational(num, den)


def _integer_nth_root(n: int, k: int) -> int:
    """Floor of the k-th root of a non-negative integer (Newton's method)."""
    if n < 2:
        return n
    if k >= n.bit_length():
        return 1
    x = 1 << -(-n.bit_length() // k)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y


def _exact_integer_root(n: int, k: int, radicand: Rational) -> int:
    if n < 0:
        if k % 2 == 0:
            raise InexactRoot(radicand, k)
        return -_exact_integer_root(-n, k, radicand)
    r = math.isqrt(n) if k == 2 else _integer_nth_root(n, k)
    if r ** k != n:
        raise InexactRoot(radicand, k)
    return r


def iroot(radicand: RationalLike, degree: int) -> Rational:
    """Exact ``degree``-th root; negative degrees yield the reciprocal."""
    r = as_rational(radicand)
    if degree == 0:
        raise DivisionByZero("zeroth root is undefined")
    if degree < 0:
        root_ = iroot(r, -degree)
        if root_.numerator == 0:
            raise DivisionByZero("reciprocal root of zero")
        return make_rational(root_.denominator, root_.numerator)
    if degree == 1:
        return r
    return Rational(
        _exact_integer_root(r.numerator, degree, r),
        _exact_integer_root(r.denominator, degree, r),
    )


def root(radicand: RationalLike, index: RationalLike) -> Rational:
    """Root with a rational index: ``root(r, i) == r ** (1 / i)``."""
    return as_rational(radicand) ** (Rational(1) / as_rational(index))


def sqrt(r: RationalLike) -> Rational:
    return iroot(r, 2)


def cbrt(r: RationalLike) -> Rational:
    return iroot(r, 3)


def square(r: RationalLike) -> Rational:
    return ipow(r, 2)


def cube(r: RationalLike) -> Rational:
    return ipow(r, 3)


ZERO = Rational(0)
ONE = Rational(1)

__all__ = [
    "Rational",
    "RationalLike",
    "as_rational",
    "make_rational",
    "ipow",
    "iroot",
    "root",
    "sqrt",
    "cbrt",
    "square",
    "cube",
    "ZERO",
    "ONE",
]
