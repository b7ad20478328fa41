"""Temperature correction and count adjustment factors (NEC 310.15(B)).

Every function takes the code edition as an explicit argument so the same
inputs always give the same factor, regardless of call order.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .errors import ParameterError
from .tables.sizes import TempRating


class NECEdition(Enum):
    NEC2014 = 2014
    NEC2017 = 2017
    NEC2020 = 2020

    @classmethod
    def from_year(cls, year: int | str) -> "NECEdition":
        for edition in cls:
            if edition.value == int(year):
                return edition
        raise ParameterError(f"Unsupported NEC edition '{year}'.")


DEFAULT_EDITION = NECEdition.NEC2014

MIN_TEMP_F = -76
MAX_TEMP_F = 185

# Bundles and conduit nipples up to this length (inches) are not derated for count.
MAX_UNDERATED_LENGTH_IN = 24

# Table 310.15(B)(2)(a): (min °F, max °F, 60 °C, 75 °C, 90 °C)
_CORRECTION_ROWS = (
    (-76, 50, 1.29, 1.2, 1.15),
    (51, 59, 1.22, 1.15, 1.12),
    (60, 68, 1.15, 1.11, 1.08),
    (69, 77, 1.08, 1.05, 1.04),
    (78, 86, 1.0, 1.0, 1.0),
    (87, 95, 0.91, 0.94, 0.96),
    (96, 104, 0.82, 0.88, 0.91),
    (105, 113, 0.71, 0.82, 0.87),
    (114, 122, 0.58, 0.75, 0.82),
    (123, 131, 0.41, 0.67, 0.76),
    (132, 140, 0.0, 0.58, 0.71),
    (141, 149, 0.0, 0.47, 0.65),
    (150, 158, 0.0, 0.33, 0.58),
    (159, 167, 0.0, 0.0, 0.5),
    (168, 176, 0.0, 0.0, 0.41),
    (177, 185, 0.0, 0.0, 0.29),
)

# Table 310.15(B)(3)(a): (max CCC, factor)
_ADJUSTMENT_BRACKETS = (
    (3, 1.0),
    (6, 0.8),
    (9, 0.7),
    (20, 0.5),
    (30, 0.45),
    (40, 0.4),
)
_ADJUSTMENT_OVER_40 = 0.35

# 310.15(B)(3)(a)(5)
CABLE_BUNDLE_EXCEPTION_FACTOR = 0.6
CABLE_BUNDLE_EXCEPTION_CCC = 20


def validate_ambient(ambient_f: float) -> float:
    if ambient_f < MIN_TEMP_F or ambient_f > MAX_TEMP_F:
        raise ParameterError(
            f"Ambient temperature must be between {MIN_TEMP_F}°F and {MAX_TEMP_F}°F, got {ambient_f}."
        )
    return ambient_f


def rooftop_temperature_adder(distance_in: float, edition: NECEdition = DEFAULT_EDITION) -> float:
    """Return the °F adder for raceways or cables exposed to sunlight on rooftops."""
    if distance_in < 0:
        return 0.0
    if edition is NECEdition.NEC2014:
        # Table 310.15(B)(3)(c)
        if distance_in <= 0.5:
            return 60.0
        if distance_in <= 3.5:
            return 40.0
        if distance_in <= 12:
            return 30.0
        if distance_in <= 36:
            return 25.0
        return 0.0
    # 310.15(B)(3)(c) since 2017: only within 7/8 in of the roof.
    return 60.0 if distance_in < 7 / 8 else 0.0


def is_rooftop_condition(distance_in: float, edition: NECEdition = DEFAULT_EDITION) -> bool:
    return rooftop_temperature_adder(distance_in, edition) > 0


def temperature_correction_factor(
    ambient_f: float,
    temp_rating: TempRating,
    edition: NECEdition = DEFAULT_EDITION,
    rooftop_distance: float = -1,
) -> float:
    """Return the ambient temperature correction factor.

    A factor of 0 means the corrected ambient exceeds what the temperature
    rating allows.
    """
    if temp_rating is TempRating.UNKNOWN:
        raise ParameterError("A temperature rating is required for the correction factor.")
    ambient = ambient_f + rooftop_temperature_adder(rooftop_distance, edition)
    if ambient < MIN_TEMP_F or ambient > MAX_TEMP_F:
        return 0.0
    column = {TempRating.T60: 2, TempRating.T75: 3, TempRating.T90: 4}[temp_rating]
    for row in _CORRECTION_ROWS:
        # fractional temperatures between bands take the hotter band
        if ambient <= row[1]:
            return row[column]
    return 0.0


def adjustment_factor_for_count(ccc: int) -> float:
    """Return the bracket factor for a number of current-carrying conductors."""
    if ccc < 0:
        raise ParameterError(f"Current-carrying conductor count cannot be negative, got {ccc}.")
    for limit, factor in _ADJUSTMENT_BRACKETS:
        if ccc <= limit:
            return factor
    return _ADJUSTMENT_OVER_40


def adjustment_factor(
    ccc: int,
    length_in: Optional[float] = None,
    nipple: bool = False,
) -> float:
    """Return the count adjustment factor.

    ``length_in`` is the bundling length for bundles and ``None`` for conduits.
    """
    if ccc < 0:
        raise ParameterError(f"Current-carrying conductor count cannot be negative, got {ccc}.")
    if nipple:
        return 1.0
    if length_in is not None and length_in <= MAX_UNDERATED_LENGTH_IN:
        return 1.0
    return adjustment_factor_for_count(ccc)


def cable_bundle_adjustment_factor(
    complies_a_4: bool,
    complies_a_5: bool,
    bundle_ccc: int,
    bundle_length_in: float,
) -> float:
    """Adjustment factor of a cable inside a bundle.

    The compliance flags come from the bundle, which evaluates
    310.15(B)(3)(a)(4) and (a)(5) for its own edition.
    """
    if complies_a_4:
        return 1.0
    if complies_a_5:
        return CABLE_BUNDLE_EXCEPTION_FACTOR
    return adjustment_factor(bundle_ccc, bundle_length_in)


def compound_factor(correction: float, adjustment: float) -> float:
    return correction * adjustment
