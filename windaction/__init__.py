"""Windaction - SANS 10160-3 wind action calculator."""

from windaction.engine import calculate
from windaction.exceptions import InvalidArgumentError
from windaction.sans10160 import (
    FundamentalWindSpeed,
    TerrainCategory,
    air_density,
    basic_wind_speed,
    is_valid_basic_wind_speed,
    is_valid_terrain_category,
    peak_wind_speed,
    peak_wind_speed_pressure,
    terrain_roughness,
)
from windaction.schemas import (
    ProfileRequest,
    ProfileRow,
    WindActionInput,
    WindActionResult,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "calculate",
    "air_density",
    "basic_wind_speed",
    "is_valid_basic_wind_speed",
    "is_valid_terrain_category",
    "peak_wind_speed",
    "peak_wind_speed_pressure",
    "terrain_roughness",
    "FundamentalWindSpeed",
    "InvalidArgumentError",
    "ProfileRequest",
    "ProfileRow",
    "TerrainCategory",
    "WindActionInput",
    "WindActionResult",
]
