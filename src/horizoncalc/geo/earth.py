from __future__ import annotations
import math

from horizoncalc.config.settings import CONSTANTS, PhysicalConstants
from horizoncalc.models.heights import GeometryResult, UnitMode

EARTH_RADIUS_M = CONSTANTS.earth_radius_m

class GeometryDomainError(ValueError):
    """Raised when the observer would sit below the reference sphere."""

def effective_observer_height(
    observer_height: float,
    subject_height: float,
    unit_mode: UnitMode = UnitMode.IMPERIAL,
    constants: PhysicalConstants = CONSTANTS,
) -> float:
    """Return the distance (m) from Earth's center to the observer.

    Observer and subject heights are summed in input units, converted to
    meters unless already metric, and the Earth radius is added.
    """
    height = observer_height + subject_height
    if unit_mode == UnitMode.METRIC:
        return height + constants.earth_radius_m
    return height * constants.feet_to_meters + constants.earth_radius_m

def _check_domain(effective_height_m: float, earth_radius_m: float) -> None:
    if not effective_height_m >= earth_radius_m:
        raise GeometryDomainError(
            f"Effective height {effective_height_m} m is below the Earth radius {earth_radius_m} m"
        )

def central_angle(effective_height_m: float, earth_radius_m: float = EARTH_RADIUS_M) -> float:
    """Angle (rad) at Earth's center between the observer's sub-point and the tangent point."""
    _check_domain(effective_height_m, earth_radius_m)
    return math.acos(earth_radius_m / effective_height_m)

def slant_range(effective_height_m: float, earth_radius_m: float = EARTH_RADIUS_M) -> float:
    """Straight-line distance (m) from the observer to the tangent point."""
    _check_domain(effective_height_m, earth_radius_m)
    return math.sqrt(effective_height_m * effective_height_m - earth_radius_m * earth_radius_m)

def solve_horizon(effective_height_m: float, earth_radius_m: float = EARTH_RADIUS_M) -> GeometryResult:
    """
    Solve the right triangle {Earth center, tangent point, observer}.

    The hypotenuse is the effective observer height and one leg is the Earth
    radius. The ground distance is the arc subtended by the central angle.
    """
    alpha = central_angle(effective_height_m, earth_radius_m)
    return GeometryResult(
        ground_distance_m=alpha * earth_radius_m,
        slant_range_m=slant_range(effective_height_m, earth_radius_m),
        central_angle_rad=alpha,
        effective_height_m=effective_height_m,
    )

__all__ = [
    "EARTH_RADIUS_M",
    "GeometryDomainError",
    "effective_observer_height",
    "central_angle",
    "slant_range",
    "solve_horizon",
]
