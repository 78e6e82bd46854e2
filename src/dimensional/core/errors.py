"""
dimensional.core.errors
=======================

Exception types raised by the dimensional core.

Each error also derives from the built-in exception that the operation would
naturally raise (``TypeError`` for operand-kind problems, ``ValueError`` for
bad values, ``ZeroDivisionError`` for zero divisors), so callers catching the
built-ins keep working.
"""

from __future__ import annotations


class DimensionalError(Exception):
    """Base class for every error raised by :mod:`dimensional`."""


class DimensionMismatch(DimensionalError, TypeError):
    """Operands of an operation requiring equal dimensions have different ones."""

    def __init__(self, op: str, left: object, right: object) -> None:
        self.op = op
        self.left = left
        self.right = right
        super().__init__(
            f"Cannot {op} quantities with different dimensions: '{left}' and '{right}'"
        )


class InexactRoot(DimensionalError, ValueError):
    """A requested root has no exact rational result."""

    def __init__(self, radicand: object, degree: int) -> None:
        self.radicand = radicand
        self.degree = degree
        super().__init__(f"inexact root of degree {degree} of {radicand}")


class MalformedLiteral(DimensionalError, ValueError):
    """A numeric literal could not be parsed into an exact rational."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"malformed literal {text!r}: {reason}")


class DivisionByZero(DimensionalError, ZeroDivisionError):
    """A rational was built with, or divided by, zero."""


class ConversionNotFound(DimensionalError, TypeError):
    """No conversion rule is registered for a (source, destination) pair."""

    def __init__(self, source: type, destination: type) -> None:
        self.source = source
        self.destination = destination
        super().__init__(
            f"no conversion registered from {source.__name__} to {destination.__name__}"
        )


class UnknownUnit(DimensionalError, ValueError):
    """A unit symbol or expression does not resolve in a registry."""


__all__ = [
    "DimensionalError",
    "DimensionMismatch",
    "InexactRoot",
    "MalformedLiteral",
    "DivisionByZero",
    "ConversionNotFound",
    "UnknownUnit",
]
