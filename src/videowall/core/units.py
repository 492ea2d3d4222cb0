"""Unit conversion for VideoWall Sizer.

All geometry is stored in millimeters. Display units only matter at the
edges, when reading user input and when formatting results.
"""

from enum import Enum


class Unit(Enum):
    """Supported display units."""

    MILLIMETERS = "mm"
    METERS = "m"
    FEET = "ft"
    INCHES = "in"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def short_label(self) -> str:
        return self.value


# Conversion factors to millimeters (base unit)
MM_PER_UNIT = {
    Unit.MILLIMETERS: 1.0,
    Unit.METERS: 1000.0,
    Unit.FEET: 304.8,
    Unit.INCHES: 25.4,
}

_LABELS = {
    Unit.MILLIMETERS: "Millimeters",
    Unit.METERS: "Meters",
    Unit.FEET: "Feet",
    Unit.INCHES: "Inches",
}


def to_mm(value: float, unit: Unit) -> float:
    """Convert a measurement in `unit` to millimeters."""
    return value * MM_PER_UNIT[unit]


def from_mm(mm: float, unit: Unit) -> float:
    """Convert millimeters to a measurement in `unit`."""
    return mm / MM_PER_UNIT[unit]
