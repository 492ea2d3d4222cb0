"""Nearest-candidate scoring.

Each candidate is scored by the sum of its relative errors against the
two locked targets. The lowest score is the nearest match.
"""

from typing import Sequence

from videowall.core.solver import CalcInput, Config, Param


# Which Config attribute measures each locked parameter
ACHIEVED = {
    Param.ASPECT_RATIO: lambda c: c.aspect_ratio,
    Param.HEIGHT: lambda c: c.height_mm,
    Param.WIDTH: lambda c: c.width_mm,
    Param.DIAGONAL: lambda c: c.diagonal_mm,
}


def score(config: Config, inp: CalcInput) -> float:
    """Sum of relative errors for the parameters locked in `inp`."""
    total = 0.0
    for param, target in inp.values().items():
        total += abs(ACHIEVED[param](config) - target) / target
    return total


def find_nearest_index(results: Sequence[Config], inp: CalcInput) -> int:
    """Return the index of the best-scoring config. Ties go to the first."""
    best_index = 0
    best_score = float("inf")
    for i, config in enumerate(results):
        s = score(config, inp)
        if s < best_score:
            best_score = s
            best_index = i
    return best_index
