"""
dimensional.units.registry
==========================

A thread-safe, extensible registry mapping unit symbols to :class:`Unit`.

- SI base, derived and convenience units are registered from
  :mod:`dimensional.units.si`.
- Prefixed units (``km``, ``µs``, ``MPa``) are synthesized on first lookup
  with the exact prefix factor; stacked prefixes are refused.
- Aliases map alternative spellings (``ohm``, ``hour``) to canonical symbols.
- Composed expressions (``kg*m/s**2``) are handed to
  :func:`dimensional.units.parser.extract_unit_expr`.

Several registries can coexist; the shared one is :data:`DEFAULT_REGISTRY`.
"""
from __future__ import annotations

import logging
import re
import threading
import unicodedata
from typing import ClassVar, Dict, Iterable, Mapping, Optional, Tuple, Union

from dimensional.core.errors import UnknownUnit
from dimensional.core.literals import parse_rational
from dimensional.core.rational import Rational, as_rational
from dimensional.core.unit import ScaleLike, Unit
from dimensional.units import si
from dimensional.units.parser import extract_unit_expr
from dimensional.units.prefixes import PREFIXES

logger = logging.getLogger(__name__)

# Longest prefix first so "da" wins over "d"
_PREFIX_SYMBOLS_DESC = tuple(sorted((p.symbol for p in PREFIXES), key=len, reverse=True))
_PREFIX_FACTORS: Mapping[str, Rational] = {p.symbol: p.factor for p in PREFIXES}

_EXPRESSION_CHARS = ("*", "/", "(", ")")

# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------
_OHM_RE = re.compile(r"(?i)ohm")
_MICRO_SIGN = "\u00b5"
_GREEK_MU = "\u03bc"


def normalize_symbol(s: str) -> str:
    """Normalize user-provided unit symbols.

    Rules:
    - Unicode normalize to NFC.
    - Greek mu and a leading ASCII ``u`` both become the micro sign.
    - Any spelling of ``ohm`` becomes ``Ω``.
    - Strip surrounding whitespace.
    """
    if not s:
        return s

    s = unicodedata.normalize("NFC", s.strip())
    s = s.replace(_GREEK_MU, _MICRO_SIGN)
    if s.startswith("u"):
        s = _MICRO_SIGN + s[1:]
    return _OHM_RE.sub("Ω", s)


# ---------------------------------------------------------------------------
# Units registry
# ---------------------------------------------------------------------------
class UnitsRegistry:
    """Thread-safe registry of named :class:`Unit` objects with prefix synthesis."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, Unit] = {}
        self._aliases: Dict[str, str] = {}
        self._non_prefixable: set[str] = set()
        self._synthesized: set[str] = set()

    def __contains__(self, symbol: str) -> bool:
        return self.has(symbol)

    def set_non_prefixable(self, symbols: Iterable[str]) -> None:
        """Mark unit symbols that must not accept SI prefixes (e.g. ``kg``, ``min``)."""
        with self._lock:
            self._non_prefixable = {normalize_symbol(s) for s in symbols}

    def is_non_prefixable(self, symbol: str) -> bool:
        return normalize_symbol(symbol) in self._non_prefixable

    # -------------------------- public API ---------------------------------
    def register(self, unit: Unit, replace: bool = False) -> None:
        """Register ``unit`` under its display name.

        Raises ``ValueError`` for an unnamed unit, a name reserved by
        :class:`UnitNamespace`, or (unless ``replace``) an existing unit or
        alias of the same name.
        """
        if not unit.name:
            raise ValueError("Cannot register an unnamed unit.")
        name = normalize_symbol(unit.name)

        with self._lock:
            if name in UnitNamespace._reserved_names:
                raise ValueError(
                    f"Cannot register unit '{name}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            if not replace:
                if name in self._units:
                    raise ValueError(
                        f"Cannot register unit '{name}': a unit with this name already exists."
                    )
                if name in self._aliases:
                    raise ValueError(
                        f"Cannot register unit '{name}': an alias with this name already exists."
                    )
            self._units[name] = unit if unit.name == name else unit.named(name)
            self._synthesized.discard(name)
        logger.debug("registered unit %s = %s", name, unit.describe())

    def register_alias(self, alias: str, canonical: str, replace: bool = False) -> None:
        norm_key = normalize_symbol(alias)
        literal_key = unicodedata.normalize("NFC", alias.strip())
        folded_key = literal_key.casefold()
        canonical = normalize_symbol(canonical)

        with self._lock:
            reserved = UnitNamespace._reserved_names
            if {norm_key, literal_key, folded_key} & reserved:
                raise ValueError(
                    f"Cannot register alias '{alias}': "
                    "name conflicts with UnitNamespace attribute/method."
                )
            if canonical not in self._units:
                raise UnknownUnit(f"Cannot alias '{alias}' to unknown unit '{canonical}'.")
            if not replace:
                for key in (literal_key, folded_key, norm_key):
                    if key in self._units and key != canonical:
                        raise ValueError(
                            f"Cannot register alias '{alias}' (which maps to '{key}'): "
                            f"a unit with the name '{key}' already exists."
                        )

            self._aliases[norm_key] = canonical
            self._aliases[literal_key] = canonical
            self._aliases[folded_key] = canonical
        logger.debug("registered alias %s -> %s", alias, canonical)

    def has(self, symbol: str) -> bool:
        try:
            self.get(symbol)
            return True
        except UnknownUnit:
            return False

    def get(self, symbol: str) -> Unit:
        """Look up a unit by symbol or expression.

        Unknown atomic symbols are synthesized from a registered base and an
        SI prefix when possible.

        Raises
        ------
        UnknownUnit
            If the symbol (or a name inside the expression) is unknown.
        """
        if any(op in symbol for op in _EXPRESSION_CHARS):
            return extract_unit_expr(symbol, self)

        sym = normalize_symbol(symbol)
        with self._lock:
            target = self._aliases.get(sym)
            if target is None:
                target = self._aliases.get(sym.casefold())
            if target is not None:
                sym = target

            u = self._units.get(sym)
            if u is not None:
                return u

            synthesized = self._try_synthesize_prefixed(sym)
            if synthesized is not None:
                return synthesized

        raise UnknownUnit(f"Unknown unit symbol: {symbol}")

    def all(self) -> Mapping[str, Unit]:
        with self._lock:
            return dict(self._units)

    def aliases(self) -> Mapping[str, str]:
        with self._lock:
            return dict(self._aliases)

    def as_namespace(self) -> "UnitNamespace":
        return UnitNamespace(self)

    # ------------------------- internals -----------------------------------
    def _split_prefix(self, symbol: str) -> Tuple[Optional[str], str]:
        for p in _PREFIX_SYMBOLS_DESC:
            if symbol.startswith(p):
                return p, symbol[len(p):]
        return None, symbol

    def _try_synthesize_prefixed(self, sym: str) -> Optional[Unit]:
        prefix, base_sym = self._split_prefix(sym)
        if prefix is None or not base_sym:
            return None

        base = self._units.get(base_sym)
        if base is None or base_sym in self._non_prefixable:
            return None
        # prefixes never stack on a synthesized unit
        if base_sym in self._synthesized:
            return None

        new_unit = Unit(base.dim, _PREFIX_FACTORS[prefix] * base.scale, sym)
        self._units[sym] = new_unit
        self._synthesized.add(sym)
        logger.debug("synthesized prefixed unit %s from %s", sym, base_sym)
        return new_unit


class UnitNamespace:
    """Attribute-style access to a registry: ``u.km``, ``u("kg*m/s**2")``."""

    _reserved_names: ClassVar[set[str]] = set()

    def __init__(self, reg: UnitsRegistry) -> None:
        self._reg = reg

    def __contains__(self, spec: str) -> bool:
        return self._reg.has(spec)

    def define(
        self,
        expr: str,
        scale: Union[ScaleLike, str],
        reference: Unit,
        replace: bool = False,
    ) -> Unit:
        """Register ``expr`` as ``scale * reference``.

        ``scale`` may be a literal string such as ``"25.4"`` or ``"0x10"``;
        it is parsed exactly.
        """
        if expr in UnitNamespace._reserved_names:
            raise ValueError(
                f"Cannot define unit '{expr}': "
                "name conflicts with UnitNamespace attribute/method."
            )
        factor = parse_rational(scale) if isinstance(scale, str) else as_rational(scale)
        unit = Unit(reference.dim, factor * reference.scale, expr)
        self._reg.register(unit, replace)
        return unit

    def __call__(self, spec: str) -> Unit:
        return self._reg.get(spec)

    def __getattr__(self, name: str) -> Unit:
        try:
            return self._reg.get(name)
        except UnknownUnit as e:
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        """List all available unit symbols for autocomplete."""
        base_dir = set(super().__dir__())
        units = set(self._reg.all().keys())
        aliases = set(self._reg.aliases().keys())
        return sorted(base_dir | units | aliases)


UnitNamespace._reserved_names = set(dir(UnitNamespace))


# ---------------------------------------------------------------------------
# Bootstrap a default registry with SI units
# ---------------------------------------------------------------------------
_ALIASES = (
    ("ohm", "Ω"),
    ("minute", "min"),
    ("minutes", "min"),
    ("hr", "h"),
    ("hour", "h"),
    ("hours", "h"),
    ("day", "d"),
    ("days", "d"),
    ("gram", "g"),
    ("metre", "m"),
    ("meter", "m"),
    ("second", "s"),
    ("litre", "L"),
    ("liter", "L"),
    ("l", "L"),
)


def _bootstrap_default_registry() -> UnitsRegistry:
    reg = UnitsRegistry()

    for unit in si.BASE_UNITS + si.DERIVED_UNITS + si.CONVENIENCE_UNITS:
        reg.register(unit)
    for alias, canonical in _ALIASES:
        reg.register_alias(alias, canonical)

    reg.set_non_prefixable(["kg", "min", "h", "d", "degC"])
    logger.debug("bootstrapped default registry: %d units", len(reg.all()))
    return reg


# Public, shared default registry
DEFAULT_REGISTRY: UnitsRegistry = _bootstrap_default_registry()


__all__ = [
    "UnitsRegistry",
    "UnitNamespace",
    "DEFAULT_REGISTRY",
    "normalize_symbol",
]
