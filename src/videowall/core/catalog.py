"""Cabinet and aspect-ratio reference data.

Two cabinet geometries are supported. Iteration order of CABINETS is
the order candidates are reported in: 16:9 first, then 1:1.
"""

from dataclasses import dataclass
from enum import Enum


class CabinetType(Enum):
    """Cabinet (tile) formats."""

    WIDE = "16:9"
    SQUARE = "1:1"


@dataclass(frozen=True)
class Cabinet:
    """Physical size of one cabinet, in millimeters."""

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class AspectRatioPreset:
    """A named aspect ratio (width / height)."""

    label: str
    value: float


CABINETS: dict[CabinetType, Cabinet] = {
    CabinetType.WIDE: Cabinet(width=600.0, height=337.5),
    CabinetType.SQUARE: Cabinet(width=500.0, height=500.0),
}

CABINET_TYPES: list[CabinetType] = list(CABINETS)

ASPECT_RATIOS: list[AspectRatioPreset] = [
    AspectRatioPreset("16:9", 16 / 9),
    AspectRatioPreset("16:10", 16 / 10),
    AspectRatioPreset("4:3", 4 / 3),
    AspectRatioPreset("1:1", 1.0),
    AspectRatioPreset("21:9", 21 / 9),
    AspectRatioPreset("32:9", 32 / 9),
]


def find_preset(value: float, tolerance: float = 0.01) -> AspectRatioPreset | None:
    """Return the first preset within `tolerance` of `value`, if any."""
    for preset in ASPECT_RATIOS:
        if abs(preset.value - value) < tolerance:
            return preset
    return None
