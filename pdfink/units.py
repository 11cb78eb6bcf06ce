"""Measurement units and conversion to and from PDF points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Unit(IntEnum):
    """Units that document coordinates may be expressed in."""

    UNSET = 0
    PT = 1
    MM = 2
    CM = 3
    IN = 4


_POINTS_PER_UNIT = {
    Unit.PT: 1.0,
    Unit.MM: 72.0 / 25.4,
    Unit.CM: 72.0 / 2.54,
    Unit.IN: 72.0,
}


def _factor(unit: int) -> float:
    try:
        return _POINTS_PER_UNIT.get(Unit(unit), 1.0)
    except ValueError:
        return 1.0


def units_to_points(unit: int, value: float) -> float:
    """Convert ``value`` expressed in ``unit`` to points.

    An unset or unknown unit leaves the value unchanged.
    """
    return value * _factor(unit)


def points_to_units(unit: int, value: float) -> float:
    """Convert ``value`` in points to ``unit``.

    An unset or unknown unit leaves the value unchanged.
    """
    return value / _factor(unit)


@dataclass
class Box:
    """A rectangle given by its four edges, such as a page trim box."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    unit_override: Unit = Unit.UNSET

    def units_to_points(self, unit: int) -> Box:
        """Return a copy of the box with its edges converted to points.

        The box's own ``unit_override``, when set, takes precedence over
        ``unit``.
        """
        if self.unit_override != Unit.UNSET:
            unit = self.unit_override
        return Box(
            left=units_to_points(unit, self.left),
            top=units_to_points(unit, self.top),
            right=units_to_points(unit, self.right),
            bottom=units_to_points(unit, self.bottom),
        )