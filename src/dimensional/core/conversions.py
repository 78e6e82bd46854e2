"""
dimensional.core.conversions
============================

Registry of two-way conversion rules between quantities and external
numeric-with-unit types (e.g. :class:`datetime.timedelta`).

Rules are keyed by ``(source type, destination type)``. Lookup walks the
source type's MRO so a rule registered for a base class also serves its
subclasses. Rules touching a :class:`Quantity` are expected to go through
``Quantity.to(scale)`` so the exactness rules of the core still apply.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from dimensional.core.errors import ConversionNotFound

logger = logging.getLogger(__name__)

Converter = Callable[[Any], Any]


class ConversionRegistry:
    """Thread-safe mapping ``(source, destination) -> converter``."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._rules: Dict[Tuple[type, type], Converter] = {}

    def register(
        self,
        source: type,
        destination: type,
        func: Converter,
        replace: bool = False,
    ) -> None:
        key = (source, destination)
        with self._lock:
            if key in self._rules and not replace:
                raise ValueError(
                    f"A conversion from {source.__name__} to {destination.__name__} "
                    "is already registered."
                )
            self._rules[key] = func
        logger.debug(
            "registered conversion %s -> %s", source.__name__, destination.__name__
        )

    def unregister(self, source: type, destination: type) -> None:
        with self._lock:
            if self._rules.pop((source, destination), None) is None:
                raise ConversionNotFound(source, destination)
        logger.debug(
            "unregistered conversion %s -> %s", source.__name__, destination.__name__
        )

    def lookup(self, source: type, destination: type) -> Converter:
        with self._lock:
            for klass in source.__mro__:
                func = self._rules.get((klass, destination))
                if func is not None:
                    return func
        raise ConversionNotFound(source, destination)

    def has(self, source: type, destination: type) -> bool:
        try:
            self.lookup(source, destination)
            return True
        except ConversionNotFound:
            return False

    def convert(self, obj: Any, destination: type) -> Any:
        return self.lookup(type(obj), destination)(obj)

    def all(self) -> Mapping[Tuple[type, type], Converter]:
        with self._lock:
            return dict(self._rules)


# ---------------------------------------------------------------------------
# Default registry, bootstrapped lazily
# ---------------------------------------------------------------------------

_DEFAULT_CONVERSIONS: Optional[ConversionRegistry] = None
_DEFAULT_LOCK = threading.Lock()


def _bootstrap_default_conversions() -> ConversionRegistry:
    # Import here to avoid circular imports (the bridge needs Quantity).
    from dimensional.units.durations import register_duration_conversions

    reg = ConversionRegistry()
    register_duration_conversions(reg)
    logger.debug("bootstrapped default conversions: %d rules", len(reg.all()))
    return reg


def default_conversions() -> ConversionRegistry:
    """Return the shared registry, creating it on first use."""
    global _DEFAULT_CONVERSIONS
    with _DEFAULT_LOCK:
        if _DEFAULT_CONVERSIONS is None:
            _DEFAULT_CONVERSIONS = _bootstrap_default_conversions()
        return _DEFAULT_CONVERSIONS


__all__ = [
    "Converter",
    "ConversionRegistry",
    "default_conversions",
]
