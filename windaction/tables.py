"""Pandas-based data tables for windaction."""

from __future__ import annotations

from typing import Any, Iterable

import pandas as pd

from windaction.sans10160 import (
    TerrainCategory,
    effective_height,
    peak_wind_speed,
    peak_wind_speed_pressure,
    terrain_roughness,
    validate_basic_wind_speed,
    validate_terrain_category,
)
from windaction.schemas import WindActionInput

PROFILE_COLUMNS = [
    "height_m",
    "effective_height_m",
    "terrain_category",
    "roughness_factor",
    "peak_wind_speed",
    "peak_pressure_pa",
]


def height_profile(data: WindActionInput, heights: Iterable[float]) -> pd.DataFrame:
    """
    Tabulate Cr(z), vp(z) and qp(z) over several heights for one input set.

    The ``height_m`` of *data* is ignored; every other field is held fixed.

    Args:
        data: Site and wind inputs
        heights: Heights above terrain in metres

    Returns:
        DataFrame with one row per height, columns ``PROFILE_COLUMNS``

    Raises:
        InvalidArgumentError: for an invalid wind speed or terrain category,
            even when *heights* is empty
    """
    validate_basic_wind_speed(data.fundamental_basic_wind_speed)
    validate_terrain_category(data.terrain_category)

    rows = []
    for height in heights:
        rows.append(
            {
                "height_m": float(height),
                "effective_height_m": float(effective_height(height, data.terrain_category)),
                "terrain_category": data.terrain_category,
                "roughness_factor": terrain_roughness(height, data.terrain_category),
                "peak_wind_speed": peak_wind_speed(
                    data.fundamental_basic_wind_speed,
                    data.probability_of_exceedance,
                    height,
                    data.terrain_category,
                    data.topography_factor,
                ),
                "peak_pressure_pa": peak_wind_speed_pressure(
                    data.altitude_m,
                    data.fundamental_basic_wind_speed,
                    data.probability_of_exceedance,
                    height,
                    data.terrain_category,
                    data.topography_factor,
                ),
            }
        )
    return pd.DataFrame(rows, columns=PROFILE_COLUMNS)


def category_profile(data: WindActionInput, heights: Iterable[float]) -> pd.DataFrame:
    """
    Compare qp(z) across all terrain categories.

    Returns:
        DataFrame indexed by ``height_m`` with one pressure column per category
    """
    heights = list(heights)
    frames = [
        height_profile(data.model_copy(update={"terrain_category": category.value}), heights)
        for category in TerrainCategory
    ]
    df = pd.concat(frames, ignore_index=True)
    table = df.pivot(index="height_m", columns="terrain_category", values="peak_pressure_pa")
    table.columns.name = None
    return table


def create_results_dataframe(results: list[dict[str, Any]]) -> pd.DataFrame:
    """
    Create a pandas DataFrame from calculation result dictionaries.

    Args:
        results: List of ``WindActionResult.model_dump()`` dictionaries

    Returns:
        DataFrame with calculation results
    """
    if not results:
        return pd.DataFrame()

    return pd.DataFrame(results)


def create_summary_table(df: pd.DataFrame) -> pd.DataFrame:
    """
    Create a summary table from a results or profile DataFrame.

    Args:
        df: DataFrame with a ``peak_pressure_pa`` column

    Returns:
        Summary DataFrame with count, min, max and mean pressure
    """
    if df.empty:
        return pd.DataFrame()

    pressures = df["peak_pressure_pa"] if "peak_pressure_pa" in df.columns else pd.Series(dtype=float)
    summary = pd.DataFrame(
        {
            "metric": ["count", "min_peak_pressure_pa", "max_peak_pressure_pa", "mean_peak_pressure_pa"],
            "value": [
                len(df),
                pressures.min() if not pressures.empty else 0,
                pressures.max() if not pressures.empty else 0,
                pressures.mean() if not pressures.empty else 0,
            ],
        }
    )
    return summary


def export_to_csv(df: pd.DataFrame, filepath: str) -> None:
    """
    Export DataFrame to CSV file.

    Args:
        df: DataFrame to export
        filepath: Path to save CSV file
    """
    df.to_csv(filepath, index=False)
