"""Display formatting helpers shared by the UI panels.

Kept free of Qt imports so they can be used (and tested) headless.
"""

from videowall.core.catalog import find_preset
from videowall.core.units import Unit, from_mm


def format_dimension(mm: float, unit: Unit, places: int = 2) -> str:
    return f"{from_mm(mm, unit):.{places}f}"


def format_aspect_ratio(value: float) -> str:
    """'16:9 (1.78)' for a known preset, otherwise '1.50:1'."""
    preset = find_preset(value)
    if preset:
        return f"{preset.label} ({value:.2f})"
    return f"{value:.2f}:1"


def format_time_ago(saved_at_ms: int, now_ms: int) -> str:
    seconds = (now_ms - saved_at_ms) // 1000
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"


def info_message(lock_count: int) -> str:
    """Prompt shown above the parameter form."""
    if lock_count == 0:
        return "Select a measurement to start"
    if lock_count == 1:
        return "Lock one more parameter to see results"
    return "Results calculated. Choose a size below."


def bound_label(index: int) -> str:
    # Results alternate lower/upper per cabinet type
    return "Lower" if index % 2 == 0 else "Upper"
