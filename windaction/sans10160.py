"""SANS 10160-3:2011 wind actions: peak wind speed pressure and its factors.

Implements the chain of formulas used to derive the peak wind speed
pressure ``qp(z)`` on a structure:

* air density as a function of site altitude (Section 7.4, Table 6),
* the probability factor applied to the fundamental basic wind speed
  (Section 7.2.2),
* the terrain roughness factor (Section 7.3.2, Table 3),
* the peak wind speed ``vp(z)`` (Section 7.3),
* the peak wind speed pressure ``qp(z)`` (Section 7.4).

References
----------
SANS 10160-3:2011, *Basis of structural design and actions for buildings
and industrial structures, Part 3: Wind actions*.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum

from windaction.exceptions import InvalidArgumentError

# ── SANS 10160-3 Edition Tag ─────────────────────────────────────────
SANS_EDITION = "SANS 10160-3:2011"

# ── Probability factor constants (Section 7.2.2) ─────────────────────
K_SHAPE = 0.2
N_EXPONENT = 0.5
REFERENCE_PROBABILITY = 0.02

# ── Mean to peak (gust) conversion of the basic wind speed ───────────
PEAK_FACTOR = 1.4

# ── Terrain roughness multiplier (Section 7.3.2) ─────────────────────
ROUGHNESS_COEFFICIENT = 1.36

# ── Air density breakpoints (Table 6) ────────────────────────────────
#   (altitude_m, density_kg_m3)
_AIR_DENSITY_TABLE: tuple[tuple[int, float], ...] = (
    (0, 1.20),
    (500, 1.12),
    (1000, 1.06),
    (1500, 1.00),
    (2000, 0.94),
)


class FundamentalWindSpeed(IntEnum):
    """Fundamental basic wind speeds ``vb,0`` in m/s (Figure 1)."""

    V28 = 28
    V32 = 32
    V36 = 36


class TerrainCategory(str, Enum):
    """Terrain categories of Table 3."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def constants(self) -> TerrainConstants:
        return TERRAIN_CONSTANTS[self]


@dataclass(frozen=True)
class TerrainConstants:
    """Roughness parameters of a terrain category.

    ``z0`` is the height of the reference plane, ``zg`` the gradient
    height, ``zc`` the height below which no further reduction in wind
    speed is allowed and ``exponent`` the power-law exponent ``a``.
    """

    z0: int
    zg: int
    zc: int
    exponent: float
    description: str


TERRAIN_CONSTANTS: dict[TerrainCategory, TerrainConstants] = {
    TerrainCategory.A: TerrainConstants(
        z0=0,
        zg=250,
        zc=1,
        exponent=0.070,
        description=(
            "Flat horizontal terrain with negligible vegetation and without "
            "obstacles, e.g. coastal areas exposed to open sea."
        ),
    ),
    TerrainCategory.B: TerrainConstants(
        z0=0,
        zg=300,
        zc=2,
        exponent=0.095,
        description=(
            "Low vegetation such as grass with isolated obstacles separated "
            "by at least 20 obstacle heights, e.g. farmland, airports."
        ),
    ),
    TerrainCategory.C: TerrainConstants(
        z0=3,
        zg=350,
        zc=5,
        exponent=0.120,
        description=(
            "Regular cover of vegetation or buildings, or isolated obstacles "
            "separated by at most 20 obstacle heights, e.g. suburbs."
        ),
    ),
    TerrainCategory.D: TerrainConstants(
        z0=5,
        zg=400,
        zc=10,
        exponent=0.150,
        description=(
            "At least 15% of the surface covered with buildings of average "
            "height exceeding 15 m, e.g. forests, city centres."
        ),
    ),
}


# ── Validators ───────────────────────────────────────────────────────


def validate_basic_wind_speed(speed: int) -> FundamentalWindSpeed:
    """Return the :class:`FundamentalWindSpeed` matching *speed*.

    Raises
    ------
    InvalidArgumentError
        If *speed* is not one of 28, 32 or 36 m/s.
    """
    try:
        return FundamentalWindSpeed(speed)
    except ValueError:
        allowed = ", ".join(str(v.value) for v in FundamentalWindSpeed)
        raise InvalidArgumentError(
            f"Invalid fundamental basic wind speed {speed!r}; expected one of {allowed} m/s"
        ) from None


def validate_terrain_category(code: str) -> TerrainCategory:
    """Return the :class:`TerrainCategory` matching *code*.

    Raises
    ------
    InvalidArgumentError
        If *code* is not exactly ``"A"``, ``"B"``, ``"C"`` or ``"D"``.
    """
    try:
        return TerrainCategory(code)
    except ValueError:
        allowed = ", ".join(c.value for c in TerrainCategory)
        raise InvalidArgumentError(
            f"Invalid terrain category {code!r}; expected one of {allowed}"
        ) from None


def is_valid_basic_wind_speed(speed: int) -> bool:
    """Assert that *speed* is a fundamental basic wind speed.

    Returns ``True`` on success and raises :class:`InvalidArgumentError`
    otherwise; it never returns ``False``.
    """
    validate_basic_wind_speed(speed)
    return True


def is_valid_terrain_category(code: str) -> bool:
    """Assert that *code* is a terrain category; raises when it is not."""
    validate_terrain_category(code)
    return True


# ── Core Calculation Functions ───────────────────────────────────────


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Invalid {name} {value!r}; must be a finite number")


def air_density(altitude: int) -> float:
    """Air density in kg/m^3 at *altitude* metres above sea level.

    Linear interpolation between the breakpoints of Table 6::

        0 m -> 1.20, 500 m -> 1.12, 1000 m -> 1.06,
        1500 m -> 1.00, 2000 m -> 0.94

    Each band is closed at its upper end. Above 2000 m the density is
    held at 0.94.

    Raises
    ------
    InvalidArgumentError
        If *altitude* is negative or not finite.
    """
    if isinstance(altitude, float):
        _require_finite("altitude", altitude)
    if altitude < 0:
        raise InvalidArgumentError(f"Invalid altitude {altitude!r}; must be >= 0 m")

    if altitude == 0:
        return _AIR_DENSITY_TABLE[0][1]

    for (x1, y1), (x2, y2) in zip(_AIR_DENSITY_TABLE, _AIR_DENSITY_TABLE[1:]):
        if x1 < altitude <= x2:
            slope = (y2 - y1) / (x2 - x1)
            return slope * altitude + (y1 - slope * x1)

    return _AIR_DENSITY_TABLE[-1][1]


def probability_factor(probability: float) -> float:
    """Probability factor ``Cprob`` of Section 7.2.2::

        Cprob = ((1 - K ln(-ln(1 - p))) / (1 - K ln(-ln(0.98)))) ^ n

    with K = 0.2 and n = 0.5. Equals 1.0 for the reference annual
    probability of exceedance p = 0.02 (50-year return period).

    ``ln(1 - p)`` is evaluated with ``log1p`` so that probabilities far
    below machine epsilon stay inside the domain of the outer logarithm.

    Raises
    ------
    InvalidArgumentError
        If *probability* is not strictly between 0 and 1.
    """
    if not 0.0 < probability < 1.0:
        raise InvalidArgumentError(
            f"Invalid probability of exceedance {probability!r}; must lie in (0, 1)"
        )

    numerator = 1 - K_SHAPE * math.log(-math.log1p(-probability))
    denominator = 1 - K_SHAPE * math.log(-math.log1p(-REFERENCE_PROBABILITY))
    return (numerator / denominator) ** N_EXPONENT


def basic_wind_speed(fundamental_speed: int, probability: float) -> float:
    """Basic wind speed ``vb = Cprob * vb,0`` in m/s.

    The fundamental speed is not validated here;
    :func:`peak_wind_speed_pressure` does that.
    """
    return probability_factor(probability) * fundamental_speed


def _effective_height(height: float, category: TerrainCategory) -> float:
    _require_finite("height", height)
    if height < 0:
        raise InvalidArgumentError(f"Invalid height {height!r}; must be >= 0 m")
    return max(height, category.constants.zc)


def _roughness(z: float, category: TerrainCategory) -> float:
    c = category.constants
    ratio = (z - c.z0) / (c.zg - c.zc)
    return ROUGHNESS_COEFFICIENT * ratio**c.exponent


def _peak_speed(vb_peak: float, cr: float, topography_factor: float) -> float:
    _require_finite("topography factor", topography_factor)
    vp = vb_peak * cr * topography_factor
    _require_finite("peak wind speed", vp)
    return vp


def _dynamic_pressure(rho: float, vp: float) -> float:
    try:
        return 0.5 * rho * vp**2
    except OverflowError:
        raise InvalidArgumentError(
            f"Peak wind speed {vp!r} m/s is too large for a finite pressure"
        ) from None


def effective_height(height: float, terrain_category: str) -> float:
    """Height used in the roughness formula: *height*, but not below ``zc``."""
    return _effective_height(height, validate_terrain_category(terrain_category))


def terrain_roughness(height: float, terrain_category: str) -> float:
    """Terrain roughness factor ``Cr(z)`` per Section 7.3.2::

        Cr(z) = 1.36 * ((z - z0) / (zg - zc)) ^ a

    For z below ``zc`` the factor is evaluated at ``zc``.

    Parameters
    ----------
    height : float
        Height above terrain in metres.
    terrain_category : str
        ``"A"``, ``"B"``, ``"C"`` or ``"D"``.

    Returns
    -------
    float
        Dimensionless roughness factor.

    Raises
    ------
    InvalidArgumentError
        For an unknown category or a negative or non-finite height.
    """
    category = validate_terrain_category(terrain_category)
    return _roughness(_effective_height(height, category), category)


def peak_wind_speed(
    fundamental_speed: int,
    probability: float,
    height: float,
    terrain_category: str,
    topography_factor: float = 1.0,
) -> float:
    """Peak wind speed ``vp(z)`` in m/s per Section 7.3::

        vp(z) = Cr(z) * Co(z) * vb,peak,   vb,peak = 1.4 * vb

    Parameters
    ----------
    fundamental_speed : int
        Fundamental basic wind speed ``vb,0`` in m/s.
    probability : float
        Annual probability of exceedance.
    height : float
        Height above terrain in metres.
    terrain_category : str
        Terrain category (A to D).
    topography_factor : float
        Topography factor ``Co(z)``. 1.0 for flat terrain (default).

    Raises
    ------
    InvalidArgumentError
        If the topography factor or the resulting speed is not finite.
    """
    vb_peak = PEAK_FACTOR * basic_wind_speed(fundamental_speed, probability)
    cr = terrain_roughness(height, terrain_category)
    return _peak_speed(vb_peak, cr, topography_factor)


def peak_wind_speed_pressure(
    altitude: int,
    fundamental_speed: int,
    probability: float,
    height: float,
    terrain_category: str,
    topography_factor: float = 1.0,
) -> float:
    """Peak wind speed pressure ``qp(z)`` in Pa per Section 7.4::

        qp(z) = 1/2 * rho * vp(z)^2

    The fundamental basic wind speed and terrain category are validated
    before anything is computed.

    Parameters
    ----------
    altitude : int
        Site altitude above sea level in metres.
    fundamental_speed : int
        Fundamental basic wind speed: 28, 32 or 36 m/s.
    probability : float
        Annual probability of exceedance, 0.02 for a 50-year return period.
    height : float
        Height above terrain in metres.
    terrain_category : str
        Terrain category (A to D).
    topography_factor : float
        Topography factor ``Co(z)``, 1.0 for flat terrain.

    Returns
    -------
    float
        Peak wind speed pressure in Pa.

    Raises
    ------
    InvalidArgumentError
        If any input is outside its allowed domain or the pressure would
        not be finite.
    """
    speed = validate_basic_wind_speed(fundamental_speed)
    category = validate_terrain_category(terrain_category)

    rho = air_density(altitude)
    vp = peak_wind_speed(speed, probability, height, category, topography_factor)
    return _dynamic_pressure(rho, vp)


@dataclass(frozen=True)
class PeakPressureResult:
    """Container for the full peak wind speed pressure breakdown."""

    peak_pressure_pa: float
    air_density: float
    probability_factor: float
    basic_wind_speed: float
    peak_basic_wind_speed: float
    effective_height: float
    roughness_factor: float
    topography_factor: float
    peak_wind_speed: float
    fundamental_speed: FundamentalWindSpeed
    terrain_category: TerrainCategory
    sans_edition: str = SANS_EDITION


def compute_peak_pressure(
    altitude: int,
    fundamental_speed: int,
    probability: float,
    height: float,
    terrain_category: str,
    topography_factor: float = 1.0,
) -> PeakPressureResult:
    """Peak wind speed pressure together with every intermediate factor.

    Same inputs, validation and arithmetic as
    :func:`peak_wind_speed_pressure`.
    """
    speed = validate_basic_wind_speed(fundamental_speed)
    category = validate_terrain_category(terrain_category)

    rho = air_density(altitude)
    cprob = probability_factor(probability)
    vb = cprob * speed
    vb_peak = PEAK_FACTOR * vb
    z = _effective_height(height, category)
    cr = _roughness(z, category)
    vp = _peak_speed(vb_peak, cr, topography_factor)

    return PeakPressureResult(
        peak_pressure_pa=_dynamic_pressure(rho, vp),
        air_density=rho,
        probability_factor=cprob,
        basic_wind_speed=vb,
        peak_basic_wind_speed=vb_peak,
        effective_height=z,
        roughness_factor=cr,
        topography_factor=topography_factor,
        peak_wind_speed=vp,
        fundamental_speed=speed,
        terrain_category=category,
    )


__all__ = [
    "K_SHAPE",
    "N_EXPONENT",
    "PEAK_FACTOR",
    "REFERENCE_PROBABILITY",
    "ROUGHNESS_COEFFICIENT",
    "SANS_EDITION",
    "TERRAIN_CONSTANTS",
    "FundamentalWindSpeed",
    "PeakPressureResult",
    "TerrainCategory",
    "TerrainConstants",
    "air_density",
    "basic_wind_speed",
    "compute_peak_pressure",
    "effective_height",
    "is_valid_basic_wind_speed",
    "is_valid_terrain_category",
    "peak_wind_speed",
    "peak_wind_speed_pressure",
    "probability_factor",
    "terrain_roughness",
    "validate_basic_wind_speed",
    "validate_terrain_category",
]
