"""
dimensional.core.quantity
=========================

Defines :class:`Quantity`, a numeric payload tagged with a :class:`Unit`.

This module provides:
- Same-unit arithmetic and comparison directly on the payloads.
- Heterogeneous (same dimension, different scale) addition, subtraction and
  comparison through an exact common scale: the gcd of the two scale
  numerators over the lcm of their denominators. Kilograms plus grams are
  computed in grams, millimetres plus inches in fifths of a millimetre.
- Multiplication and division by quantities, units, Rationals and plain
  numbers, which combine units without any dimensional requirement.
- Exact unit conversion with :meth:`Quantity.to`.
- Conversion to and from external types through the registry in
  :mod:`dimensional.core.conversions`.

The payload type is preserved wherever the arithmetic allows it: integer
payloads stay integers across rescaling, floats stay floats.
"""

from __future__ import annotations

import math
import operator
from decimal import Decimal
from fractions import Fraction
from numbers import Number
from typing import Any, Callable, Tuple

from dimensional.core.conversions import default_conversions
from dimensional.core.dimensions import Dimension, Exponent, _exact_exponent
from dimensional.core.errors import DimensionMismatch
from dimensional.core.rational import Rational, as_rational, make_rational
from dimensional.core.unit import UNITLESS, ScaleLike, Unit


def _rescale(value: Any, ratio: Rational) -> Any:
    """Multiply ``value`` by an exact ratio, keeping its numeric type if possible."""
    if ratio.denominator == 1:
        return value * ratio.numerator
    if isinstance(value, int):
        q, r = divmod(value * ratio.numerator, ratio.denominator)
        if r == 0:
            return q
        return Fraction(value * ratio.numerator, ratio.denominator)
    if isinstance(value, Fraction):
        return value * ratio.as_fraction()
    return value * ratio.numerator / ratio.denominator


def common_scale(a: Rational, b: Rational) -> Rational:
    """Largest scale that both ``a`` and ``b`` are integer multiples of."""
    return make_rational(
        math.gcd(a.numerator, b.numerator), math.lcm(a.denominator, b.denominator)
    )


def _align(op: str, a: "Quantity", b: "Quantity") -> Tuple[Any, Any, Unit]:
    """Payloads of ``a`` and ``b`` expressed in one shared unit."""
    if a._unit == b._unit:
        return a._value, b._value, a._unit
    if a._unit.dim != b._unit.dim:
        raise DimensionMismatch(op, a._unit, b._unit)

    sa, sb = a._unit.scale, b._unit.scale
    common = common_scale(sa, sb)
    # both ratios are integers by construction of the common scale
    a_factor = int(sa / common)
    b_factor = int(sb / common)

    if common == sa:
        unit = a._unit
    elif common == sb:
        unit = b._unit
    else:
        unit = Unit(a._unit.dim, common)
    return a._value * a_factor, b._value * b_factor, unit


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.15g}"
    return str(value)


class Quantity:
    """
    A numeric value paired with a :class:`Unit`.

    Attributes
    ----------
    value : numbers.Number
        The payload, expressed in ``unit``.
    unit : Unit
        Dimension and exact scale of the payload.

    Quantities are immutable; ``+=`` and ``-=`` rebind the name to a new
    quantity expressed in the left operand's unit.
    """

    __slots__ = ("_value", "_unit")

    def __init__(self, value: Any, unit: Unit = UNITLESS) -> None:
        if isinstance(value, Rational):
            value = value.as_fraction()
        if isinstance(value, Quantity) or not isinstance(value, Number):
            raise TypeError(f"Quantity payload must be a number, got {type(value).__name__}")
        if not isinstance(unit, Unit):
            raise TypeError(f"Expected Unit, got {type(unit).__name__}")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_unit", unit)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Quantity is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Quantity is immutable")

    def __copy__(self) -> "Quantity":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Quantity":
        return self

    # --- Accessors ---
    @property
    def value(self) -> Any:
        return self._value

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def dim(self) -> Dimension:
        return self._unit.dim

    @property
    def scale(self) -> Rational:
        return self._unit.scale

    # --- Conversion ---
    def to(self, target: "Unit | ScaleLike") -> "Quantity":
        """
        Express this quantity in ``target``.

        ``target`` is either a :class:`Unit` of the same dimension or a bare
        scale relative to the coherent reference unit. The payload is rescaled
        by the exact ratio of the current scale to the target scale.

        Raises
        ------
        DimensionMismatch
            If ``target`` is a unit of another dimension.
        """
        if isinstance(target, Unit):
            if target.dim != self.dim:
                raise DimensionMismatch("convert", self._unit, target)
            new_unit = target
        else:
            new_unit = Unit(self.dim, as_rational(target))

        if new_unit.scale == self.scale:
            return Quantity(self._value, new_unit)
        return Quantity(_rescale(self._value, self.scale / new_unit.scale), new_unit)

    def to_reference(self) -> "Quantity":
        """Express this quantity in the coherent (scale 1) unit of its dimension."""
        return self.to(1)

    def convert(self, destination: type) -> Any:
        """Convert to an external type through the default conversion registry."""
        return default_conversions().convert(self, destination)

    @classmethod
    def from_external(cls, obj: Any) -> "Quantity":
        """Build a quantity from an external object with a registered rule."""
        return default_conversions().convert(obj, cls)

    # --- Comparison ---
    def _compare(self, other: Any, op: Callable[[Any, Any], bool], name: str) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        a, b, _ = _align(name, self, other)
        return op(a, b)

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq, "compare")

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt, "compare")

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le, "compare")

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt, "compare")

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge, "compare")

    def __hash__(self) -> int:
        # float rescaling in _align rounds; only the dimension is stable
        return hash(self.dim)

    # --- Arithmetic ---
    def __add__(self, other: Any) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        a, b, unit = _align("add", self, other)
        return Quantity(a + b, unit)

    def __sub__(self, other: Any) -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        a, b, unit = _align("subtract", self, other)
        return Quantity(a - b, unit)

    def __iadd__(self, other: Any) -> "Quantity":
        return (self + other).to(self._unit)

    def __isub__(self, other: Any) -> "Quantity":
        return (self - other).to(self._unit)

    def __neg__(self) -> "Quantity":
        return Quantity(-self._value, self._unit)

    def __pos__(self) -> "Quantity":
        return self

    def __abs__(self) -> "Quantity":
        return Quantity(abs(self._value), self._unit)

    def __mul__(self, other: Any) -> "Quantity":
        if isinstance(other, Quantity):
            return Quantity(self._value * other._value, self._unit * other._unit)
        if isinstance(other, (Unit, Rational)):
            return Quantity(self._value, self._unit * other)
        if isinstance(other, Number):
            return Quantity(self._value * other, self._unit)
        return NotImplemented

    def __rmul__(self, other: Any) -> "Quantity":
        if isinstance(other, (Unit, Rational)):
            return Quantity(self._value, other * self._unit)
        if isinstance(other, Number):
            return Quantity(other * self._value, self._unit)
        return NotImplemented

    def __truediv__(self, other: Any) -> "Quantity":
        if isinstance(other, Quantity):
            return Quantity(self._value / other._value, self._unit / other._unit)
        if isinstance(other, (Unit, Rational)):
            return Quantity(self._value, self._unit / other)
        if isinstance(other, Number):
            return Quantity(self._value / other, self._unit)
        return NotImplemented

    def __rtruediv__(self, other: Any) -> "Quantity":
        if isinstance(other, (Unit, Rational)):
            return Quantity(1 / self._value, other / self._unit)
        if isinstance(other, Number):
            return Quantity(other / self._value, self._unit ** -1)
        return NotImplemented

    def __pow__(self, n: Exponent, modulo: Any | None = None) -> "Quantity":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Quantity.")
        p = _exact_exponent(n)
        new_unit = self._unit ** p  # checked before touching the payload
        if p.denominator == 1:
            return Quantity(self._value ** p.numerator, new_unit)
        if isinstance(self._value, Decimal):
            return Quantity(self._value ** (Decimal(p.numerator) / p.denominator), new_unit)
        return Quantity(self._value ** (p.numerator / p.denominator), new_unit)

    def sqrt(self) -> "Quantity":
        new_unit = self._unit.sqrt()
        v = self._value
        root = v.sqrt() if hasattr(v, "sqrt") else math.sqrt(v)
        return Quantity(root, new_unit)

    def cbrt(self) -> "Quantity":
        new_unit = self._unit.cbrt()
        v = self._value
        if isinstance(v, Decimal):
            root = (abs(v) ** (Decimal(1) / 3)).copy_sign(v)
        else:
            root = math.copysign(abs(v) ** (1 / 3), v)
        return Quantity(root, new_unit)

    # --- Display ---
    def __repr__(self) -> str:
        mag = _format_value(self._value)
        if self._unit.is_unitless:
            return mag
        return f"{mag} {self._unit}"

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for Quantity objects.

        Supported specifiers
        --------------------
        "" (empty), or "native"
            Display the quantity in its current unit (default).
        "ref"
            Display the quantity in the coherent reference unit.
        any numeric format spec
            Applied to the payload, e.g. ``f"{q:.2f}"`` → ``'2.50 km'``.
        """
        spec = spec or ""
        if spec.strip().lower() in ("", "native"):
            return repr(self)
        if spec.strip().lower() == "ref":
            return repr(self.to_reference())
        mag = format(self._value, spec)
        if self._unit.is_unitless:
            return mag
        return f"{mag} {self._unit}"


def make_quantity(value: Any, unit: Unit = UNITLESS) -> Quantity:
    return Quantity(value, unit)


def sqrt(x: Any) -> Any:
    """Square root of a Rational, Unit or Quantity (exact where it must be)."""
    if isinstance(x, (Rational, Unit, Quantity)):
        return x.sqrt()
    return math.sqrt(x)


def cbrt(x: Any) -> Any:
    if isinstance(x, (Rational, Unit, Quantity)):
        return x.cbrt()
    return math.copysign(abs(x) ** (1 / 3), x)


__all__ = [
    "Quantity",
    "common_scale",
    "make_quantity",
    "sqrt",
    "cbrt",
]
