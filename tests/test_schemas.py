"""Tests for windaction schemas."""

import math

import pytest
from pydantic import ValidationError

from windaction.schemas import ProfileRequest, WindActionInput
from tests.conftest import SAMPLE_PROFILE_REQUEST


def test_input_defaults():
    """Defaults describe a 50-year wind at sea level on flat category A terrain."""
    inp = WindActionInput()
    assert inp.altitude_m == 0
    assert inp.fundamental_basic_wind_speed == 28
    assert inp.probability_of_exceedance == 0.02
    assert inp.height_m == 1.0
    assert inp.terrain_category == "A"
    assert inp.topography_factor == 1.0
    assert inp.project_name is None


def test_terrain_category_is_normalized():
    inp = WindActionInput(terrain_category=" c ")
    assert inp.terrain_category == "C"


def test_negative_altitude_rejected():
    with pytest.raises(ValidationError):
        WindActionInput(altitude_m=-5)


@pytest.mark.parametrize("probability", [0.0, 1.0, -0.1])
def test_probability_outside_open_interval_rejected(probability):
    with pytest.raises(ValidationError):
        WindActionInput(probability_of_exceedance=probability)


def test_non_positive_topography_rejected():
    with pytest.raises(ValidationError):
        WindActionInput(topography_factor=0)


def test_wind_speed_left_to_engine():
    """The enumerated wind speeds are checked by the calculation, not the schema."""
    inp = WindActionInput(fundamental_basic_wind_speed=30)
    assert inp.fundamental_basic_wind_speed == 30


def test_profile_request_parses_nested_inputs():
    request = ProfileRequest(**SAMPLE_PROFILE_REQUEST)
    assert request.inputs.terrain_category == "C"
    assert request.inputs.fundamental_basic_wind_speed == 32
    assert request.heights_m == [5.0, 10.0, 20.0]


def test_profile_request_defaults():
    request = ProfileRequest()
    assert request.inputs == WindActionInput()
    assert request.heights_m is None


@pytest.mark.parametrize("field", ["height_m", "topography_factor"])
@pytest.mark.parametrize("value", [math.inf, math.nan])
def test_non_finite_floats_rejected(field, value):
    with pytest.raises(ValidationError):
        WindActionInput(**{field: value})
