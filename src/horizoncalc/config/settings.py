from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field

class PhysicalConstants(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Mean radius (WolframAlpha)
    earth_radius_m: float = Field(6371009.0, gt=0)
    feet_to_meters: float = Field(1.0 / 3.28084, gt=0)
    meters_to_miles: float = Field(0.00062137, gt=0)
    meters_to_km: float = Field(1.0 / 1000.0, gt=0)

CONSTANTS = PhysicalConstants()

class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    constants: PhysicalConstants = CONSTANTS

def load_settings() -> Settings:
    """
    Return the built-in settings.

    The calculator reads no config file or environment; everything it needs
    is fixed here.
    """
    return Settings()

__all__ = ["PhysicalConstants", "CONSTANTS", "Settings", "load_settings"]
