"""
dimensional.units.parser
========================

Parsing of unit expressions (``"kg*m/s**2"``, ``"m**(1/2)"``) and of
quantity literals (``"25.4 mm"``, ``"0x10 kg*m/s**2"``).

Expressions are compiled to a registry-independent plan that is cached, then
evaluated against whichever registry is passed in.
"""
from __future__ import annotations

import re
from fractions import Fraction
from functools import lru_cache
from typing import TYPE_CHECKING, Optional, Tuple, Union

from dimensional.core.errors import MalformedLiteral, UnknownUnit
from dimensional.core.literals import parse_rational
from dimensional.core.quantity import Quantity
from dimensional.core.rational import Rational, make_rational
from dimensional.core.unit import UNITLESS, Unit

if TYPE_CHECKING:
    from dimensional.units.registry import UnitsRegistry

# --- Plan node types ------------------------------------------------
# ("name", <str>, None)
# ("pow", <plan>, <Rational>)
# ("mul", <plan>, <plan>)
# ("div", <plan>, <plan>)
Plan = Tuple[str, Union[str, "Plan"], Union[Rational, "Plan", None]]


# ---------------- Parser that builds a PLAN (no registry lookups!) ----------------
class _UnitExprParser:
    """
    Grammar:
      expr     := term (('*' | '/') term)*
      term     := factor ['**' exponent]?
      factor   := NAME | '(' expr ')'
      exponent := signed_int | '(' signed_int ['/' int] ')'
      NAME     := letter or '_' followed by letters, digits or '_'
    """

    def __init__(self, text: str):
        self.s = text
        self.n = len(text)
        self.i = 0

    def parse(self) -> Plan:
        plan = self._parse_expr()
        self._skip_ws()
        if self.i != self.n:
            raise UnknownUnit(
                f"Unexpected trailing input at {self.i}: {self.s[self.i:self.i+10]!r}"
            )
        return plan

    # expr := term (('*' | '/') term)*
    def _parse_expr(self) -> Plan:
        left = self._parse_term()
        while True:
            if self._peek("*") and not self._peek("**"):
                self._eat("*")
                left = ("mul", left, self._parse_term())
            elif self._peek("/"):
                self._eat("/")
                left = ("div", left, self._parse_term())
            else:
                break
        return left

    # term := factor ['**' exponent]?
    def _parse_term(self) -> Plan:
        base = self._parse_factor()
        if self._peek("**"):
            self._eat("**")
            base = ("pow", base, self._parse_exponent())
        return base

    # factor := NAME | '(' expr ')'
    def _parse_factor(self) -> Plan:
        if self._peek("("):
            self._eat("(")
            val = self._parse_expr()
            self._eat(")")
            return val
        name = self._parse_name()
        if not name:
            ch = self.s[self.i:self.i+1]
            raise UnknownUnit(f"Expected unit name or '(' at {self.i}, got {ch!r}")
        return ("name", name, None)

    # exponent := signed_int | '(' signed_int ['/' int] ')'
    def _parse_exponent(self) -> Rational:
        if self._peek("("):
            self._eat("(")
            num = self._parse_signed_int()
            den = 1
            if self._peek("/"):
                self._eat("/")
                den = self._parse_signed_int()
            self._eat(")")
            if den == 0:
                raise UnknownUnit("Exponent denominator must be non-zero")
            return make_rational(num, den)
        return make_rational(self._parse_signed_int())

    # ---- token helpers ----
    def _parse_name(self) -> Optional[str]:
        self._skip_ws()
        i0 = self.i
        if i0 < self.n and (self.s[i0].isalpha() or self.s[i0] == "_"):
            self.i += 1
            while self.i < self.n and (self.s[self.i].isalnum() or self.s[self.i] == "_"):
                self.i += 1
            return self.s[i0:self.i]
        return None

    def _parse_signed_int(self) -> int:
        self._skip_ws()
        i0 = self.i
        if self.i < self.n and self.s[self.i] in "+-":
            self.i += 1
        i1 = self.i
        while self.i < self.n and self.s[self.i].isdigit():
            self.i += 1
        if i1 == self.i:
            raise UnknownUnit(f"Expected integer exponent at {self.i}")
        return int(self.s[i0:self.i])

    def _skip_ws(self) -> None:
        s, n, i = self.s, self.n, self.i
        while i < n and s[i].isspace():
            i += 1
        self.i = i

    def _peek(self, tok: str) -> bool:
        self._skip_ws()
        return self.s.startswith(tok, self.i)

    def _eat(self, tok: str) -> None:
        if not self._peek(tok):
            got = self.s[self.i:self.i+len(tok)]
            raise UnknownUnit(f"Expected {tok!r} at {self.i}, got {got!r}")
        self.i += len(tok)


# ---------------- Evaluation of a plan against a given registry ----------------
def _eval_plan(plan: Plan, reg: "UnitsRegistry") -> Unit:
    kind = plan[0]
    if kind == "name":
        return reg.get(plan[1])  # late binding to the provided registry
    if kind == "pow":
        return _eval_plan(plan[1], reg) ** plan[2]
    if kind == "mul":
        return _eval_plan(plan[1], reg) * _eval_plan(plan[2], reg)
    if kind == "div":
        return _eval_plan(plan[1], reg) / _eval_plan(plan[2], reg)
    raise RuntimeError(f"Invalid plan node: {plan!r}")


_DISALLOWED = set("~!@#$%^&|=,:;?<>'\"`\\[]{}")


@lru_cache(maxsize=4096)
def _compile_unit_expr(expr: str) -> Plan:
    # '+' is tolerated only as an exponent sign; the parser enforces where
    if any(c in _DISALLOWED for c in expr):
        raise UnknownUnit(
            "Only *, /, **, parentheses, unit names and integer or (p/q) exponents are allowed."
        )
    return _UnitExprParser(expr).parse()


def extract_unit_expr(expr: str, reg: "UnitsRegistry") -> Unit:
    """
    Parse a unit expression like ``'kg*m/(nF**2 * s**2)'`` or ``'m**(1/2)'``.

    The compiled plan is cached by ``expr`` only; names are bound to units
    from ``reg`` at call time. A fractional exponent whose scale root is not
    exact raises :class:`~dimensional.core.errors.InexactRoot`.

    Raises
    ------
    UnknownUnit
        On a syntax error or an unknown unit name.
    """
    return _eval_plan(_compile_unit_expr(expr), reg)


# ---------------- Quantity literals ----------------
_QUANTITY_RE = re.compile(
    r"""
    \s*
    (?P<num>[+-]?(?:0[xX][0-9a-fA-F_'.]+|0[bB][01_'.]+|[0-9][0-9_'.]*|\.[0-9][0-9_']*))
    \s*
    (?P<unit>.*?)
    \s*$
    """,
    re.X | re.S,
)
_SCIENTIFIC_TAIL = re.compile(r"[eEpP][+-]?[0-9]")


def parse_quantity(text: str, reg: "Optional[UnitsRegistry]" = None) -> Quantity:
    """
    Parse ``"<literal> [unit expression]"`` into an exact :class:`Quantity`.

    The literal follows :func:`~dimensional.core.literals.parse_rational`;
    the payload is an ``int`` when integral and a ``Fraction`` otherwise.

    >>> parse_quantity("1.5 km")
    3/2 km
    """
    m = _QUANTITY_RE.fullmatch(text)
    if m is None:
        raise MalformedLiteral(text, "expected a number followed by a unit expression")
    unit_text = m.group("unit")
    if _SCIENTIFIC_TAIL.match(unit_text):
        raise MalformedLiteral(text, "scientific format is not supported")

    r = parse_rational(m.group("num"))
    value: Union[int, Fraction] = int(r) if r.is_integer() else r.as_fraction()

    if not unit_text:
        return Quantity(value, UNITLESS)
    if reg is None:
        from dimensional.units.registry import DEFAULT_REGISTRY

        reg = DEFAULT_REGISTRY
    return Quantity(value, reg.get(unit_text))


__all__ = ["extract_unit_expr", "parse_quantity"]
