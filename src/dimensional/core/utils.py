"""
dimensional.core.utils
======================

Helpers for composing and displaying unit names (e.g. ``'kg·m/s²'``).

Names are display metadata only. Composition works on a symbol → exponent
map so that ``km·s/km`` collapses to ``s`` and repeated symbols merge into a
power, mirroring the dimension algebra.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Pattern, Tuple

from dimensional.core.dimensions import Dimension
from dimensional.core.rational import Rational, make_rational

SymbolMap = Dict[str, Rational]

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")
_FROM_SUPERSCRIPTS = str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹⁻", "0123456789-")


def _sup(e: Rational) -> str:
    if e == 1:
        return ""
    if e.denominator == 1:
        return str(e.numerator).translate(_SUPERSCRIPTS)
    return f"^({e})"


# match token like "cm", "s^2", "m^(2)", "m^(1/2)", or with unicode superscripts "m²"
_TOKEN_RE: Pattern[str] = re.compile(
    r"""
    \s*
    (?P<sym>[^·*/\s^⁰¹²³⁴⁵⁶⁷⁸⁹⁻()]+)
    (?:
        \^\(?(?P<num>-?\d+)(?:/(?P<den>\d+))?\)?   # ^2, ^(2), ^(1/2)
        |
        (?P<usup>[⁰¹²³⁴⁵⁶⁷⁸⁹⁻]+)                 # unicode superscripts
    )?
    \s*
""",
    re.X,
)


def _parse_exponent(m: re.Match[str]) -> Rational:
    num = m.group("num")
    if num is not None:
        return make_rational(int(num), int(m.group("den") or 1))
    us = m.group("usup")
    if us:
        return Rational(int(us.translate(_FROM_SUPERSCRIPTS)))
    return Rational(1)


def _partition_top_level(name: str) -> Tuple[str, str, str]:
    """Like ``str.partition("/")`` but ignores slashes inside ``^(p/q)``."""
    depth = 0
    for i, ch in enumerate(name):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "/" and depth == 0:
            return name[:i], "/", name[i + 1:]
    return name, "", ""


def _split_group(group: str) -> List[str]:
    group = group.strip()
    if group.startswith("(") and group.endswith(")"):
        group = group[1:-1]
    return [tok for tok in re.split(r"[·*]", group) if tok.strip()]


def tokenize_name(name: str) -> Optional[SymbolMap]:
    """
    Split a composed unit name into symbol exponents.

    Understands the names produced by :func:`format_symbols`
    (``num`` or ``num/den`` with an optionally parenthesised denominator).
    Returns ``None`` when the name cannot be decomposed.
    """
    if not name or name == "1":
        return {}

    numerator, slash, denominator = _partition_top_level(name)
    groups = [(numerator, 1)]
    if slash:
        groups.append((denominator, -1))

    exps: SymbolMap = {}
    for group, sign in groups:
        for tok in _split_group(group):
            if tok.strip() == "1":
                continue
            m = _TOKEN_RE.fullmatch(tok)
            if not m:
                return None
            sym = m.group("sym")
            exps[sym] = exps.get(sym, Rational(0)) + _parse_exponent(m) * sign

    # Drop zeros
    return {k: v for k, v in exps.items() if v != 0}


def combine_symbols(*maps: SymbolMap) -> SymbolMap:
    combined: SymbolMap = {}
    for mapping in maps:
        for sym, exp in mapping.items():
            combined[sym] = combined.get(sym, Rational(0)) + exp
    return {k: v for k, v in combined.items() if v != 0}


def scale_symbols(mapping: SymbolMap, factor: Rational) -> SymbolMap:
    scaled = {sym: exp * factor for sym, exp in mapping.items()}
    return {k: v for k, v in scaled.items() if v != 0}


def format_symbols(mapping: SymbolMap) -> str:
    """Format a symbol map as ``'kg·m/s²'``; insertion order is preserved."""
    if not mapping:
        return ""

    num: List[Tuple[str, Rational]] = [(s, e) for s, e in mapping.items() if e > 0]
    den: List[Tuple[str, Rational]] = [(s, -e) for s, e in mapping.items() if e < 0]

    def join(parts: List[Tuple[str, Rational]]) -> str:
        if not parts:
            return "1"
        return "·".join(f"{s}{_sup(p)}" for s, p in parts)

    if not den:
        return join(num)
    den_s = join(den)
    if len(den) > 1:
        den_s = f"({den_s})"
    return f"{join(num)}/{den_s}"


# ---------- Dimension → readable string ----------
def format_dim(dim: Dimension) -> str:
    """Turn a dimension into ``'mass·length/time²'`` style using tag names."""
    mapping = {tag.name: exp for tag, exp in dim}
    return format_symbols(mapping) or "1"


__all__ = [
    "SymbolMap",
    "tokenize_name",
    "combine_symbols",
    "scale_symbols",
    "format_symbols",
    "format_dim",
]
