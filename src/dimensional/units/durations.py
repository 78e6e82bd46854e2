"""
dimensional.units.durations
===========================

Bridge between time quantities and external duration types.

An external duration type is described by its tick period, an exact
:class:`Rational` number of seconds. Converting a quantity goes through
``Quantity.to(period)`` so integer payloads stay exact; converting back
yields a quantity whose unit has that period as its scale.

:class:`datetime.timedelta` is wired in by default with a one-microsecond
period.
"""
from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable, Tuple

from dimensional.core.conversions import ConversionRegistry, Converter
from dimensional.core.errors import DimensionMismatch
from dimensional.core.quantity import Quantity
from dimensional.core.rational import Rational, make_rational
from dimensional.core.unit import Unit
from dimensional.units import si

TIMEDELTA_PERIOD: Rational = make_rational(1, 1_000_000)


def duration_converters(
    period: Rational,
    from_ticks: Callable[[Any], Any],
    to_ticks: Callable[[Any], Any],
    unit_name: str = "",
) -> Tuple[Converter, Converter]:
    """
    Build ``(quantity -> external, external -> quantity)`` converters.

    ``from_ticks`` builds the external object from a tick count and
    ``to_ticks`` reads the tick count back.
    """
    tick_unit = Unit(si.TIME, period, unit_name)

    def to_external(q: Quantity) -> Any:
        if q.dim != si.TIME:
            raise DimensionMismatch("convert", q.unit, si.second)
        return from_ticks(q.to(tick_unit).value)

    def from_external(obj: Any) -> Quantity:
        return Quantity(to_ticks(obj), tick_unit)

    return to_external, from_external


def _timedelta_from_ticks(count: Any) -> timedelta:
    if not isinstance(count, (int, float)):
        count = float(count)
    return timedelta(microseconds=count)


def _timedelta_to_ticks(td: timedelta) -> int:
    return (td.days * 86_400 + td.seconds) * 1_000_000 + td.microseconds


def register_duration_conversions(registry: ConversionRegistry) -> None:
    """Register ``Quantity <-> datetime.timedelta`` on ``registry``."""
    to_td, from_td = duration_converters(
        TIMEDELTA_PERIOD, _timedelta_from_ticks, _timedelta_to_ticks, "µs"
    )
    registry.register(Quantity, timedelta, to_td)
    registry.register(timedelta, Quantity, from_td)


def to_timedelta(q: Quantity) -> timedelta:
    """Shortcut for ``q.convert(datetime.timedelta)``."""
    return q.convert(timedelta)


def from_timedelta(td: timedelta) -> Quantity:
    """Shortcut for ``Quantity.from_external(td)``; exact, in microseconds."""
    return Quantity.from_external(td)


__all__ = [
    "TIMEDELTA_PERIOD",
    "duration_converters",
    "register_duration_conversions",
    "to_timedelta",
    "from_timedelta",
]
