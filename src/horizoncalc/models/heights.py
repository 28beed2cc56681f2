from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from horizoncalc.config.settings import CONSTANTS

class UnitMode(str, Enum):
    IMPERIAL = "imperial"  # heights in feet
    METRIC = "metric"  # heights in meters

    @classmethod
    def from_flag(cls, metric: bool) -> "UnitMode":
        return cls.METRIC if metric else cls.IMPERIAL

@dataclass
class HeightInput:
    observer_height: float
    subject_height: Optional[float] = None  # None means "the horizon"
    unit_mode: UnitMode = UnitMode.IMPERIAL

    @property
    def effective_subject_height(self) -> float:
        """Subject height used in the sum; an absent subject sits on the surface."""
        if self.subject_height is None:
            return 0.0
        return self.subject_height

@dataclass(frozen=True)
class GeometryResult:
    ground_distance_m: float
    slant_range_m: float
    central_angle_rad: float
    effective_height_m: float

    @property
    def ground_distance_km(self) -> float:
        return self.ground_distance_m * CONSTANTS.meters_to_km

    @property
    def ground_distance_miles(self) -> float:
        return self.ground_distance_m * CONSTANTS.meters_to_miles

__all__ = ["UnitMode", "HeightInput", "GeometryResult"]
