"""Pydantic schemas for windaction data models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from windaction.sans10160 import SANS_EDITION


class WindActionInput(BaseModel):
    """Inputs for a peak wind speed pressure calculation.

    Every field has a documented default so callers name what they change
    instead of relying on argument position.
    """

    altitude_m: int = Field(
        default=0, ge=0, description="Site altitude above sea level in metres"
    )
    fundamental_basic_wind_speed: int = Field(
        default=28, description="Fundamental basic wind speed vb,0 in m/s (28, 32 or 36)"
    )
    probability_of_exceedance: float = Field(
        default=0.02,
        gt=0,
        lt=1,
        allow_inf_nan=False,
        description="Annual probability of exceedance (0.02 = 50-year return period)",
    )
    height_m: float = Field(
        default=1.0, ge=0, allow_inf_nan=False, description="Height above terrain in metres"
    )
    terrain_category: str = Field(default="A", description="Terrain category (A, B, C or D)")
    topography_factor: float = Field(
        default=1.0,
        gt=0,
        allow_inf_nan=False,
        description="Topography factor Co(z); 1.0 for flat terrain",
    )
    project_name: Optional[str] = Field(None, description="Optional project identifier")

    @field_validator("terrain_category", mode="before")
    @classmethod
    def _normalize_terrain_category(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class WindActionResult(BaseModel):
    """Peak wind speed pressure with the full factor breakdown."""

    project_name: Optional[str] = None
    peak_pressure_pa: float = Field(..., description="Peak wind speed pressure qp(z) in Pa")
    peak_pressure_kpa: float = Field(..., description="Peak wind speed pressure qp(z) in kPa")
    air_density: float = Field(..., description="Air density in kg/m^3")
    probability_factor: float = Field(..., description="Probability factor Cprob")
    basic_wind_speed: float = Field(..., description="Basic wind speed vb in m/s")
    peak_basic_wind_speed: float = Field(..., description="Peak basic wind speed vb,peak in m/s")
    effective_height_m: float = Field(
        ..., description="Height used for Cr(z), never below the category's zc"
    )
    roughness_factor: float = Field(..., description="Terrain roughness factor Cr(z)")
    peak_wind_speed: float = Field(..., description="Peak wind speed vp(z) in m/s")
    inputs: WindActionInput
    sans_edition: str = SANS_EDITION
    warnings: List[str] = Field(default_factory=list)
    assumptions: List[str] = Field(default_factory=list)


class ProfileRequest(BaseModel):
    """Request for a pressure profile over several heights."""

    inputs: WindActionInput = Field(default_factory=WindActionInput)
    heights_m: Optional[List[float]] = Field(
        None, description="Heights above terrain in metres; settings default when omitted"
    )


class ProfileRow(BaseModel):
    """One height of a pressure profile."""

    height_m: float
    effective_height_m: float
    terrain_category: str
    roughness_factor: float
    peak_wind_speed: float
    peak_pressure_pa: float


__all__ = [
    "ProfileRequest",
    "ProfileRow",
    "WindActionInput",
    "WindActionResult",
]
