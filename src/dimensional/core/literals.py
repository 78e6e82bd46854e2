"""
dimensional.core.literals
=========================

Exact parsing of numeric literal text into :class:`Rational`.

Grammar
-------
- ``0x`` prefix selects base 16, ``0b`` base 2, a leading ``0`` followed by
  anything other than ``.`` selects base 8; everything else is base 10.
  ``"0.1"`` is therefore decimal while ``"00.1"`` is octal (``1/8``).
- At most one ``.``. The value is the integer mantissa formed by all digits
  over ``base ** <number of fractional digits>``.
- ``_`` and ``'`` are digit-group separators and are ignored.
- Scientific notation is rejected rather than truncated.
"""

from __future__ import annotations

from functools import lru_cache

from dimensional.core.errors import MalformedLiteral
from dimensional.core.rational import Rational, make_rational

_SEPARATORS = str.maketrans("", "", "_'")

_PREFIXED_BASES = {"0x": 16, "0b": 2}


def _split_base(body: str) -> tuple[int, str]:
    prefix = body[:2]
    if prefix in _PREFIXED_BASES:
        return _PREFIXED_BASES[prefix], body[2:]
    if len(body) > 1 and body[0] == "0" and body[1] != ".":
        return 8, body[1:]
    return 10, body


@lru_cache(maxsize=1024)
def parse_rational(text: str) -> Rational:
    """
    Parse ``text`` into an exact :class:`Rational`.

    >>> parse_rational("0x10")
    Rational(16, 1)
    >>> parse_rational("00.1")
    Rational(1, 8)
    >>> parse_rational("1'000.5")
    Rational(2001, 2)

    Raises
    ------
    MalformedLiteral
        On an empty literal, a digit outside the base's range, a second
        decimal point, or a scientific-notation marker.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    body = text.strip().translate(_SEPARATORS).lower()
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]
    if not body:
        raise MalformedLiteral(text, "no digits")

    base, digits = _split_base(body)

    exponent_markers = ("p",) if base == 16 else ("e", "p")
    if any(marker in digits for marker in exponent_markers):
        raise MalformedLiteral(text, "scientific format is not supported")

    if digits.count(".") > 1:
        raise MalformedLiteral(text, "more than one decimal point")
    whole, _, fraction = digits.partition(".")
    mantissa_digits = whole + fraction
    if not mantissa_digits:
        raise MalformedLiteral(text, "no digits")

    for ch in mantissa_digits:
        if not ch.isascii() or not ch.isalnum() or int(ch, 36) >= base:
            raise MalformedLiteral(text, f"digit {ch!r} out of range for base {base}")

    mantissa = int(mantissa_digits, base)
    if negative:
        mantissa = -mantissa
    return make_rational(mantissa, base ** len(fraction))


__all__ = ["parse_rational"]
