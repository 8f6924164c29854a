"""Wind action calculation engine."""

from __future__ import annotations

import logging

from windaction.sans10160 import (
    REFERENCE_PROBABILITY,
    PeakPressureResult,
    compute_peak_pressure,
)
from windaction.schemas import WindActionInput, WindActionResult

logger = logging.getLogger(__name__)

# Altitude above which Table 6 holds the air density constant.
_MAX_TABULATED_ALTITUDE_M = 2000


def calculate(data: WindActionInput) -> WindActionResult:
    """
    Calculate the peak wind speed pressure and its factors for one input set.

    Raises:
        InvalidArgumentError: if the wind speed, terrain category or any
            continuous input is outside the range allowed by SANS 10160-3.
    """
    logger.debug("Calculating peak wind speed pressure for %s", data.model_dump())

    breakdown = compute_peak_pressure(
        altitude=data.altitude_m,
        fundamental_speed=data.fundamental_basic_wind_speed,
        probability=data.probability_of_exceedance,
        height=data.height_m,
        terrain_category=data.terrain_category,
        topography_factor=data.topography_factor,
    )

    warnings_list = _build_warnings(data, breakdown)
    for message in warnings_list:
        logger.info(message)

    return WindActionResult(
        project_name=data.project_name,
        peak_pressure_pa=breakdown.peak_pressure_pa,
        peak_pressure_kpa=breakdown.peak_pressure_pa / 1000.0,
        air_density=breakdown.air_density,
        probability_factor=breakdown.probability_factor,
        basic_wind_speed=breakdown.basic_wind_speed,
        peak_basic_wind_speed=breakdown.peak_basic_wind_speed,
        effective_height_m=breakdown.effective_height,
        roughness_factor=breakdown.roughness_factor,
        peak_wind_speed=breakdown.peak_wind_speed,
        inputs=data,
        sans_edition=breakdown.sans_edition,
        warnings=warnings_list,
        assumptions=_assumptions(breakdown),
    )


def _build_warnings(data: WindActionInput, breakdown: PeakPressureResult) -> list[str]:
    warnings: list[str] = []
    if data.altitude_m > _MAX_TABULATED_ALTITUDE_M:
        warnings.append(
            f"Altitude {data.altitude_m} m is above {_MAX_TABULATED_ALTITUDE_M} m; "
            f"air density held at {breakdown.air_density:.2f} kg/m^3."
        )
    if breakdown.effective_height > data.height_m:
        warnings.append(
            f"Height {data.height_m:g} m is below zc for terrain category "
            f"{breakdown.terrain_category.value}; Cr(z) evaluated at "
            f"{breakdown.effective_height:g} m."
        )
    if data.probability_of_exceedance != REFERENCE_PROBABILITY:
        warnings.append(
            f"Probability of exceedance {data.probability_of_exceedance:g} differs from "
            f"the 50-year reference {REFERENCE_PROBABILITY:g}; Cprob = "
            f"{breakdown.probability_factor:.4f}."
        )
    if data.topography_factor != 1.0:
        warnings.append(
            f"Topography factor Co(z) = {data.topography_factor:g} supplied by user; "
            "verify against the topographic provisions of the standard."
        )
    return warnings


def _assumptions(breakdown: PeakPressureResult) -> list[str]:
    c = breakdown.terrain_category.constants
    return [
        f"Fundamental basic wind speed vb,0 = {breakdown.fundamental_speed.value} m/s "
        "taken from the national wind map.",
        "vb = Cprob * vb,0 with Cprob = ((1 - K ln(-ln(1-p))) / "
        "(1 - K ln(-ln 0.98)))^n, K = 0.2, n = 0.5.",
        "vb,peak = 1.4 * vb (mean to peak conversion).",
        f"Cr(z) = 1.36 * ((z - {c.z0}) / ({c.zg} - {c.zc}))^{c.exponent} "
        f"for terrain category {breakdown.terrain_category.value}.",
        f"Terrain category {breakdown.terrain_category.value}: {c.description}",
        "vp(z) = Cr(z) * Co(z) * vb,peak.",
        "qp(z) = 0.5 * rho * vp(z)^2 with rho interpolated from site altitude.",
        f"Calculation per {breakdown.sans_edition}.",
    ]


__all__ = [
    "calculate",
]
