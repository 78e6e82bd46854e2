"""
Dimensional: exact dimensional analysis for Python.

Quantities carry a unit made of a dimension vector and an exact rational
scale, so converting between kilometres and millimetres, or adding inches to
millimetres, never loses precision. Mismatched dimensions are rejected at the
operation that mixes them.

This module exposes the core API. The units registry (``dimensional.units.u``)
is imported lazily to avoid import-time side effects.
"""

from importlib import metadata as _metadata

from dimensional.core.dimensions import (
    DIMENSIONLESS,
    Dimension,
    DimensionTag,
    base_dimension,
    dimension,
)
from dimensional.core.errors import (
    ConversionNotFound,
    DimensionalError,
    DimensionMismatch,
    DivisionByZero,
    InexactRoot,
    MalformedLiteral,
    UnknownUnit,
)
from dimensional.core.literals import parse_rational
from dimensional.core.quantity import Quantity, cbrt, common_scale, make_quantity, sqrt
from dimensional.core.rational import Rational, as_rational, ipow, iroot, make_rational, root
from dimensional.core.unit import UNITLESS, Unit, scaled, unit_of

__author__ = "Dimensional contributors"
__license__ = "MIT"

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("dimensional")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "Rational",
    "make_rational",
    "as_rational",
    "ipow",
    "iroot",
    "root",
    "parse_rational",
    "Dimension",
    "DimensionTag",
    "DIMENSIONLESS",
    "base_dimension",
    "dimension",
    "Unit",
    "UNITLESS",
    "unit_of",
    "scaled",
    "Quantity",
    "make_quantity",
    "common_scale",
    "sqrt",
    "cbrt",
    "DimensionalError",
    "DimensionMismatch",
    "InexactRoot",
    "MalformedLiteral",
    "DivisionByZero",
    "ConversionNotFound",
    "UnknownUnit",
]
