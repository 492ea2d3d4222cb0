"""Grid solver for VideoWall Sizer.

Turns two locked wall constraints into candidate cabinet grids. For each
cabinet type the solver brackets the exact (fractional) target between a
lower and an upper integer grid, giving four candidates in total:

    [16:9 lower, 16:9 upper, 1:1 lower, 1:1 upper]

All lengths are millimeters; aspect ratio is width / height.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from videowall.core.catalog import CABINETS, Cabinet, CabinetType


class Param(Enum):
    """The four wall parameters a user can lock."""

    ASPECT_RATIO = "aspectRatio"
    HEIGHT = "height"
    WIDTH = "width"
    DIAGONAL = "diagonal"

    @property
    def label(self) -> str:
        return _PARAM_LABELS[self]


_PARAM_LABELS = {
    Param.ASPECT_RATIO: "Aspect ratio",
    Param.HEIGHT: "Height",
    Param.WIDTH: "Width",
    Param.DIAGONAL: "Diagonal",
}


class Combo(Enum):
    """Which pair of parameters is locked. Selects the solving path."""

    AR_HEIGHT = "ar_height"
    AR_WIDTH = "ar_width"
    AR_DIAGONAL = "ar_diagonal"
    HEIGHT_WIDTH = "height_width"
    HEIGHT_DIAGONAL = "height_diagonal"
    WIDTH_DIAGONAL = "width_diagonal"

    @property
    def params(self) -> tuple[Param, Param]:
        return COMBO_PARAMS[self]


# Declaration order is the matching precedence
COMBO_PARAMS: dict[Combo, tuple[Param, Param]] = {
    Combo.AR_HEIGHT: (Param.ASPECT_RATIO, Param.HEIGHT),
    Combo.AR_WIDTH: (Param.ASPECT_RATIO, Param.WIDTH),
    Combo.AR_DIAGONAL: (Param.ASPECT_RATIO, Param.DIAGONAL),
    Combo.HEIGHT_WIDTH: (Param.HEIGHT, Param.WIDTH),
    Combo.HEIGHT_DIAGONAL: (Param.HEIGHT, Param.DIAGONAL),
    Combo.WIDTH_DIAGONAL: (Param.WIDTH, Param.DIAGONAL),
}

_PARAM_FIELDS = {
    Param.ASPECT_RATIO: "aspect_ratio",
    Param.HEIGHT: "height",
    Param.WIDTH: "width",
    Param.DIAGONAL: "diagonal",
}


@dataclass(frozen=True)
class CalcInput:
    """Two locked constraints, tagged with their combo.

    Exactly the fields named by `combo` are set; the others stay None.
    """

    combo: Combo
    aspect_ratio: float | None = None
    height: float | None = None
    width: float | None = None
    diagonal: float | None = None

    def __post_init__(self):
        expected = set(self.combo.params)
        for param, name in _PARAM_FIELDS.items():
            is_set = getattr(self, name) is not None
            if is_set != (param in expected):
                raise ValueError(
                    f"{self.combo.value} input must set exactly "
                    f"{', '.join(p.value for p in self.combo.params)}"
                )

    def value(self, param: Param) -> float:
        return getattr(self, _PARAM_FIELDS[param])

    def values(self) -> dict[Param, float]:
        return {param: self.value(param) for param in self.combo.params}

    @classmethod
    def from_locked(cls, values: Mapping[Param, float]) -> "CalcInput | None":
        """Build an input from exactly two locked parameters.

        Returns None for any other number of parameters.
        """
        if len(values) != 2:
            return None
        locked = set(values)
        for combo, params in COMBO_PARAMS.items():
            if locked == set(params):
                fields = {_PARAM_FIELDS[p]: values[p] for p in params}
                return cls(combo=combo, **fields)
        return None


@dataclass(frozen=True)
class Config:
    """One candidate wall: a rows x cols grid of a single cabinet type."""

    cabinet_type: CabinetType
    rows: int
    cols: int
    total_cabinets: int
    width_mm: float
    height_mm: float
    diagonal_mm: float
    aspect_ratio: float

    @classmethod
    def from_grid(cls, rows: int, cols: int, cabinet_type: CabinetType) -> "Config":
        cabinet = CABINETS[cabinet_type]
        width = cols * cabinet.width
        height = rows * cabinet.height
        return cls(
            cabinet_type=cabinet_type,
            rows=rows,
            cols=cols,
            total_cabinets=rows * cols,
            width_mm=width,
            height_mm=height,
            diagonal_mm=math.sqrt(width**2 + height**2),
            aspect_ratio=width / height,
        )


@dataclass(frozen=True)
class SolveResult:
    """Outcome of `calculate`: four configs, or the reason there are none."""

    configs: tuple[Config, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def floor_ceil(exact: float) -> tuple[int, int]:
    """Bracket `exact` between two distinct integers, both at least 1."""
    lower = max(math.floor(exact), 1)
    upper = math.ceil(exact)
    if upper <= lower:
        upper = lower + 1
    return lower, upper


def _round_half_up(value: float) -> int:
    # Compare the fraction directly; value + 0.5 can round up in float
    whole = math.floor(value)
    return whole + (1 if value - whole >= 0.5 else 0)


# ---------------------------------------------------------------------------
# Solving paths. Each returns [(rows, cols) lower, (rows, cols) upper].
# ---------------------------------------------------------------------------

Grid = tuple[int, int]


def _from_height(ar: float, height: float, cab: Cabinet) -> list[Grid]:
    grids = []
    for rows in floor_ceil(height / cab.height):
        cols = _round_half_up(rows * cab.height * ar / cab.width)
        grids.append((rows, max(cols, 1)))
    return grids


def _from_width(ar: float, width: float, cab: Cabinet) -> list[Grid]:
    grids = []
    for cols in floor_ceil(width / cab.width):
        rows = _round_half_up(cols * cab.width / ar / cab.height)
        grids.append((max(rows, 1), cols))
    return grids


def _from_height_width(height: float, width: float, cab: Cabinet) -> list[Grid]:
    # Brackets are paired by rank, not jointly optimized
    rows_lower, rows_upper = floor_ceil(height / cab.height)
    cols_lower, cols_upper = floor_ceil(width / cab.width)
    return [(rows_lower, cols_lower), (rows_upper, cols_upper)]


def _ar_height(inp: CalcInput, cab: Cabinet) -> list[Grid]:
    return _from_height(inp.aspect_ratio, inp.height, cab)


def _ar_width(inp: CalcInput, cab: Cabinet) -> list[Grid]:
    return _from_width(inp.aspect_ratio, inp.width, cab)


def _ar_diagonal(inp: CalcInput, cab: Cabinet) -> list[Grid]:
    height = inp.diagonal / math.sqrt(1 + inp.aspect_ratio**2)
    return _from_height(inp.aspect_ratio, height, cab)


def _height_width(inp: CalcInput, cab: Cabinet) -> list[Grid]:
    return _from_height_width(inp.height, inp.width, cab)


def _height_diagonal(inp: CalcInput, cab: Cabinet) -> list[Grid]:
    width = math.sqrt(inp.diagonal**2 - inp.height**2)
    return _from_height_width(inp.height, width, cab)


def _width_diagonal(inp: CalcInput, cab: Cabinet) -> list[Grid]:
    height = math.sqrt(inp.diagonal**2 - inp.width**2)
    return _from_height_width(height, inp.width, cab)


SOLVERS: dict[Combo, Callable[[CalcInput, Cabinet], list[Grid]]] = {
    Combo.AR_HEIGHT: _ar_height,
    Combo.AR_WIDTH: _ar_width,
    Combo.AR_DIAGONAL: _ar_diagonal,
    Combo.HEIGHT_WIDTH: _height_width,
    Combo.HEIGHT_DIAGONAL: _height_diagonal,
    Combo.WIDTH_DIAGONAL: _width_diagonal,
}


def check_input(inp: CalcInput) -> str | None:
    """Return why `inp` has no valid geometry, or None if it is solvable."""
    for param, value in inp.values().items():
        if not math.isfinite(value) or value <= 0:
            return f"{param.label} must be greater than zero"

    if inp.combo is Combo.HEIGHT_DIAGONAL and inp.diagonal <= inp.height:
        return "Diagonal must be greater than height"
    if inp.combo is Combo.WIDTH_DIAGONAL and inp.diagonal <= inp.width:
        return "Diagonal must be greater than width"
    return None


def calculate(inp: CalcInput) -> SolveResult:
    """Compute the four candidate grids for `inp`."""
    error = check_input(inp)
    if error is not None:
        return SolveResult(error=error)

    solve = SOLVERS[inp.combo]
    configs = []
    for cabinet_type, cabinet in CABINETS.items():
        for rows, cols in solve(inp, cabinet):
            configs.append(Config.from_grid(rows, cols, cabinet_type))
    return SolveResult(configs=tuple(configs))
