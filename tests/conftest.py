"""Shared test data."""

# Reference case: 1500 m altitude, vb,0 = 28 m/s, 50-year return period,
# 12 m above terrain category A, flat terrain.
REFERENCE_PRESSURE_PA = 929.47437481210955

SAMPLE_INPUT = {
    "altitude_m": 1500,
    "fundamental_basic_wind_speed": 28,
    "probability_of_exceedance": 0.02,
    "height_m": 12,
    "terrain_category": "A",
    "topography_factor": 1.0,
    "project_name": "Test Project",
}

SAMPLE_PROFILE_REQUEST = {
    "inputs": {
        "altitude_m": 0,
        "fundamental_basic_wind_speed": 32,
        "terrain_category": "C",
    },
    "heights_m": [5.0, 10.0, 20.0],
}
