from horizoncalc.config.settings import CONSTANTS, PhysicalConstants
from horizoncalc.geo.earth import effective_observer_height, solve_horizon
from horizoncalc.models.heights import GeometryResult, HeightInput
from horizoncalc.validation import validate_heights

import logging

logger = logging.getLogger(__name__)

def compute_horizon(heights: HeightInput, constants: PhysicalConstants = CONSTANTS) -> GeometryResult:
    """
    Validate the heights, normalize them to meters and solve for the horizon.
    """
    validate_heights(heights.observer_height, heights.subject_height)
    logger.debug(
        f"Heights accepted: observer={heights.observer_height}, "
        f"subject={heights.subject_height}, units={heights.unit_mode.value}"
    )

    effective_height = effective_observer_height(
        heights.observer_height,
        heights.effective_subject_height,
        heights.unit_mode,
        constants,
    )
    logger.debug(f"Effective observer height: {effective_height:.3f} m from Earth's center")

    result = solve_horizon(effective_height, constants.earth_radius_m)
    logger.debug(
        f"Central angle {result.central_angle_rad:.6f} rad, "
        f"ground distance {result.ground_distance_m:.1f} m, slant range {result.slant_range_m:.1f} m"
    )
    return result

__all__ = ["compute_horizon"]
