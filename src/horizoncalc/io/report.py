from __future__ import annotations
from rich.console import Console

from horizoncalc.config.settings import CONSTANTS
from horizoncalc.models.heights import GeometryResult

REPORT_TEMPLATE = (
    "Ground distance:\n"
    "\n"
    "{ground_m:.0f} m\n"
    "{ground_mi:.2f} mi\n"
    "{ground_km:.2f} km\n"
    "\n"
    "Slant range:\n"
    "\n"
    "{slant_m:.0f} m"
)

def to_kilometers(meters: float) -> float:
    return meters * CONSTANTS.meters_to_km

def to_miles(meters: float) -> float:
    return meters * CONSTANTS.meters_to_miles

def render_report(result: GeometryResult) -> str:
    """Render ground distance (m, mi, km) and slant range (m) as fixed-precision text."""
    return REPORT_TEMPLATE.format(
        ground_m=result.ground_distance_m,
        ground_mi=to_miles(result.ground_distance_m),
        ground_km=to_kilometers(result.ground_distance_m),
        slant_m=result.slant_range_m,
    )

def print_report(result: GeometryResult, console: Console) -> None:
    # Plain text only; no markup or number highlighting so the bytes match render_report.
    console.print(render_report(result), markup=False, highlight=False, soft_wrap=True)

__all__ = ["REPORT_TEMPLATE", "to_kilometers", "to_miles", "render_report", "print_report"]
