"""
dimensional.core.unit
=====================

A :class:`Unit` pairs a :class:`Dimension` with an exact :class:`Rational`
scale relative to the coherent reference unit of that dimension.

Two units are equal only when both dimension and scale are exactly equal;
``is_convertible`` is the weaker, dimension-only relation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from numbers import Number
from typing import TYPE_CHECKING, Any, Optional, Union

from dimensional.core.dimensions import DIMENSIONLESS, Dimension, Exponent, _exact_exponent
from dimensional.core.rational import Rational, as_rational, make_rational
from dimensional.core.utils import (
    SymbolMap,
    combine_symbols,
    format_dim,
    format_symbols,
    scale_symbols,
    tokenize_name,
)

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from dimensional.core.quantity import Quantity

ScaleLike = Union[Rational, int, Fraction]


@dataclass(frozen=True, slots=True)
class Unit:
    """
    A physical unit.

    Attributes
    ----------
    dim : Dimension
        Canonical dimension vector, e.g. ``mass·length/time²``.
    scale : Rational
        Exact size relative to the coherent reference unit. Examples:
        kg=1, g=1/1000, min=60.
    name : str
        Display symbol (``"kg"``, ``"m/s²"``). Not part of equality.
    """

    dim: Dimension
    scale: Rational = Rational(1)
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.dim, Dimension):
            object.__setattr__(self, "dim", Dimension(self.dim))
        if not isinstance(self.scale, Rational):
            object.__setattr__(self, "scale", as_rational(self.scale))
        if self.scale == 0:
            raise ValueError("Unit scale must be non-zero")

    # --- Relations ---
    def is_convertible(self, other: "Unit") -> bool:
        return self.dim == other.dim

    @property
    def is_unitless(self) -> bool:
        return self.dim.is_dimensionless and self.scale == 1

    def named(self, name: str) -> "Unit":
        """The same unit under another display name."""
        return Unit(self.dim, self.scale, name)

    # --- Naming helpers ---
    def _symbols(self) -> Optional[SymbolMap]:
        if self.name:
            return tokenize_name(self.name)
        if self.is_unitless:
            return {}
        return None

    @staticmethod
    def _compose(left: "Unit", right: "Unit", sign: int) -> str:
        a = left._symbols()
        b = right._symbols()
        if a is None or b is None:
            return ""
        return format_symbols(combine_symbols(a, scale_symbols(b, Rational(sign))))

    # --- Algebra ---
    def __mul__(self, other: Any) -> "Unit":
        if isinstance(other, Unit):
            return Unit(
                self.dim * other.dim,
                self.scale * other.scale,
                Unit._compose(self, other, 1),
            )
        if isinstance(other, Rational):
            return Unit(self.dim, self.scale * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Union[Unit, Quantity]":
        # Rational * unit is a scaled unit; a plain number makes a quantity
        if isinstance(other, Rational):
            return Unit(self.dim, other * self.scale)
        if isinstance(other, Number):
            from dimensional.core.quantity import Quantity

            return Quantity(other, self)
        return NotImplemented

    def __truediv__(self, other: Any) -> "Unit":
        if isinstance(other, Unit):
            return Unit(
                self.dim / other.dim,
                self.scale / other.scale,
                Unit._compose(self, other, -1),
            )
        if isinstance(other, Rational):
            return Unit(self.dim, self.scale / other)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> "Unit":
        if isinstance(other, Rational):
            return other * (self ** -1)
        if isinstance(other, int) and other == 1:
            return self ** -1
        if isinstance(other, Number):
            raise TypeError(
                f"Invalid operation: cannot divide {other} by a Unit ({self.name}). "
                "Only 1/unit (reciprocal) or Rational/unit is supported."
            )
        return NotImplemented

    def __pow__(self, n: Exponent, modulo: Any | None = None) -> "Unit":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Unit.")
        p = _exact_exponent(n)
        new_dim = self.dim ** p
        new_scale = self.scale ** p  # raises InexactRoot on an inexact scale root

        symbols = self._symbols()
        name = "" if symbols is None else format_symbols(scale_symbols(symbols, p))
        return Unit(new_dim, new_scale, name)

    def sqrt(self) -> "Unit":
        return self ** make_rational(1, 2)

    def cbrt(self) -> "Unit":
        return self ** make_rational(1, 3)

    # --- Display ---
    def describe(self) -> str:
        """Readable form that does not depend on the display name."""
        dim = format_dim(self.dim)
        if self.scale == 1:
            return dim
        return f"{self.scale}·{dim}"

    def __str__(self) -> str:
        return self.name or self.describe()


def unit_of(dim: Dimension, name: str = "") -> Unit:
    """The coherent (scale 1) unit of ``dim``."""
    return Unit(Dimension(dim), Rational(1), name)


def scaled(scale: ScaleLike, unit: Unit, name: str = "") -> Unit:
    """``scale * unit`` under an optional display name."""
    return Unit(unit.dim, as_rational(scale) * unit.scale, name)


UNITLESS: Unit = unit_of(DIMENSIONLESS)

__all__ = ["Unit", "ScaleLike", "unit_of", "scaled", "UNITLESS"]
