"""Standard ampere ratings for fuses and inverse time circuit breakers (NEC 240.6(A))."""

from __future__ import annotations

from enum import Enum
from typing import Optional

STANDARD_RATINGS = (
    15, 20, 25, 30, 35, 40, 45, 50, 60, 70, 80, 90, 100, 110, 125, 150, 175, 200, 225, 250, 300,
    350, 400, 450, 500, 600, 700, 800, 1000, 1200, 1600, 2000, 2500, 3000, 4000, 5000, 6000,
)

# 240.4(B) allows the next higher standard rating only up to this value.
NEXT_HIGHER_RULE_LIMIT = 800


class OCPDType(Enum):
    FUSE = "FUSE"
    INVERSE_TIME_BREAKER = "INVERSE TIME BREAKER"
    INSTANTANEOUS_TRIP_BREAKER = "INSTANTANEOUS TRIP BREAKER"


def is_standard_rating(rating: float) -> bool:
    return rating in STANDARD_RATINGS


def next_higher_rating(current: float) -> int:
    """Return the first standard rating not below ``current`` (6000 A at most)."""
    for rating in STANDARD_RATINGS:
        if rating >= current:
            return rating
    return STANDARD_RATINGS[-1]


def next_lower_rating(current: float) -> int:
    """Return the last standard rating not above ``current`` (15 A at least)."""
    for rating in reversed(STANDARD_RATINGS):
        if rating <= current:
            return rating
    return STANDARD_RATINGS[0]


def rating_for(ampacity: float, next_higher_rule_applies: bool) -> int:
    """Standard rating protecting a conductor of ``ampacity`` per 240.4(B)."""
    if next_higher_rule_applies and ampacity < NEXT_HIGHER_RULE_LIMIT:
        return next_higher_rating(ampacity)
    return next_lower_rating(ampacity)


def closest_rating(current: float) -> int:
    return min(STANDARD_RATINGS, key=lambda rating: (abs(rating - current), rating))


def rating_above(rating: int) -> Optional[int]:
    """Return the standard rating strictly above ``rating``."""
    for candidate in STANDARD_RATINGS:
        if candidate > rating:
            return candidate
    return None


def rating_below(rating: int) -> Optional[int]:
    """Return the standard rating strictly below ``rating``."""
    for candidate in reversed(STANDARD_RATINGS):
        if candidate < rating:
            return candidate
    return None
