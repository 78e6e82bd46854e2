# dimensional.units.prefixes

from __future__ import annotations

from dataclasses import dataclass

from dimensional.core.rational import Rational, ipow, make_rational


@dataclass(frozen=True, slots=True)
class Prefix:
    symbol: str
    name: str
    factor: Rational


def _p(symbol: str, name: str, power_of_ten: int) -> Prefix:
    return Prefix(symbol, name, ipow(make_rational(10), power_of_ten))


# yotta ... yocto, all exact
PREFIXES: tuple[Prefix, ...] = (
    _p("Y", "yotta", 24),
    _p("Z", "zetta", 21),
    _p("E", "exa", 18),
    _p("P", "peta", 15),
    _p("T", "tera", 12),
    _p("G", "giga", 9),
    _p("M", "mega", 6),
    _p("k", "kilo", 3),
    _p("h", "hecto", 2),
    _p("da", "deca", 1),
    _p("d", "deci", -1),
    _p("c", "centi", -2),
    _p("m", "milli", -3),
    _p("µ", "micro", -6),
    _p("n", "nano", -9),
    _p("p", "pico", -12),
    _p("f", "femto", -15),
    _p("a", "atto", -18),
    _p("z", "zepto", -21),
    _p("y", "yocto", -24),
)

PREFIXES_BY_SYMBOL = {p.symbol: p for p in PREFIXES}
PREFIXES_BY_NAME = {p.name: p for p in PREFIXES}

__all__ = ["Prefix", "PREFIXES", "PREFIXES_BY_SYMBOL", "PREFIXES_BY_NAME"]
