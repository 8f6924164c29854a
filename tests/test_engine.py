"""Tests for windaction engine."""

import math

import pytest

from windaction import InvalidArgumentError, WindActionInput, calculate
from windaction.sans10160 import TerrainCategory
from tests.conftest import REFERENCE_PRESSURE_PA, SAMPLE_INPUT


def test_calculate_reference_case():
    result = calculate(WindActionInput(**SAMPLE_INPUT))

    assert result.peak_pressure_pa == REFERENCE_PRESSURE_PA
    assert result.peak_pressure_kpa == pytest.approx(REFERENCE_PRESSURE_PA / 1000.0)
    assert result.air_density == 1.0
    assert result.probability_factor == 1.0
    assert result.basic_wind_speed == 28
    assert result.effective_height_m == 12
    assert result.project_name == "Test Project"
    assert result.inputs.terrain_category == "A"
    assert result.sans_edition == "SANS 10160-3:2011"
    assert result.warnings == []
    assert result.assumptions


def test_defaults_describe_sea_level_flat_terrain():
    result = calculate(WindActionInput())

    assert result.air_density == 1.20
    assert result.effective_height_m == 1
    assert result.peak_pressure_pa > 0
    assert result.warnings == []


def test_invalid_wind_speed_raises():
    with pytest.raises(InvalidArgumentError):
        calculate(WindActionInput(fundamental_basic_wind_speed=30))


def test_invalid_terrain_category_raises():
    with pytest.raises(InvalidArgumentError):
        calculate(WindActionInput(terrain_category="E"))


def test_warning_for_altitude_above_table():
    result = calculate(WindActionInput(altitude_m=2500, height_m=10))

    assert result.air_density == 0.94
    assert any("above 2000 m" in w for w in result.warnings)


def test_warning_for_height_below_zc():
    result = calculate(WindActionInput(height_m=5, terrain_category="D"))

    assert result.effective_height_m == 10
    assert any("below zc" in w for w in result.warnings)


def test_warning_for_non_reference_probability():
    result = calculate(WindActionInput(probability_of_exceedance=0.01, height_m=10))

    assert result.probability_factor > 1.0
    assert result.basic_wind_speed > 28
    assert any("Probability of exceedance" in w for w in result.warnings)


def test_warning_for_topography_factor():
    flat = calculate(WindActionInput(height_m=10))
    hill = calculate(WindActionInput(height_m=10, topography_factor=2.0))

    assert hill.peak_pressure_pa == 4 * flat.peak_pressure_pa
    assert any("Topography factor" in w for w in hill.warnings)


def test_assumptions_name_terrain_constants():
    result = calculate(WindActionInput(height_m=20, terrain_category="C"))

    assert any("(z - 3) / (350 - 5)" in a for a in result.assumptions)


def test_assumptions_describe_terrain_category():
    result = calculate(WindActionInput(height_m=20, terrain_category="C"))
    description = TerrainCategory.C.constants.description

    assert any(description in a for a in result.assumptions)


def test_tiny_probability_is_calculated():
    result = calculate(WindActionInput(probability_of_exceedance=1e-17, height_m=10))

    assert math.isfinite(result.peak_pressure_pa)
    assert result.probability_factor > 1.0
