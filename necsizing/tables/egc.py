"""Minimum equipment grounding conductor sizes (NEC Table 250.122)."""

from __future__ import annotations

from ..errors import ParameterError
from .sizes import Metal, Size

# (OCPD rating not exceeding, copper, aluminum or copper-clad aluminum)
_EGC_TABLE = (
    (15, Size.AWG_14, Size.AWG_12),
    (20, Size.AWG_12, Size.AWG_10),
    (60, Size.AWG_10, Size.AWG_8),
    (100, Size.AWG_8, Size.AWG_6),
    (200, Size.AWG_6, Size.AWG_4),
    (300, Size.AWG_4, Size.AWG_2),
    (400, Size.AWG_3, Size.AWG_1),
    (500, Size.AWG_2, Size.AWG_1_0),
    (600, Size.AWG_1, Size.AWG_2_0),
    (800, Size.AWG_1_0, Size.AWG_3_0),
    (1000, Size.AWG_2_0, Size.AWG_4_0),
    (1200, Size.AWG_3_0, Size.KCMIL_250),
    (1600, Size.AWG_4_0, Size.KCMIL_350),
    (2000, Size.KCMIL_250, Size.KCMIL_400),
    (2500, Size.KCMIL_350, Size.KCMIL_600),
    (3000, Size.KCMIL_400, Size.KCMIL_600),
    (4000, Size.KCMIL_500, Size.KCMIL_750),
    (5000, Size.KCMIL_700, Size.KCMIL_1250),
    (6000, Size.KCMIL_800, Size.KCMIL_1250),
)

MIN_OCPD_RATING = _EGC_TABLE[0][0]
MAX_OCPD_RATING = _EGC_TABLE[-1][0]


def egc_size(ocpd_rating: float, metal: Metal = Metal.COPPER) -> Size:
    """Return the minimum EGC size for an OCPD rating."""
    if ocpd_rating < MIN_OCPD_RATING or ocpd_rating > MAX_OCPD_RATING:
        raise ParameterError(
            f"OCPD rating must be between {MIN_OCPD_RATING} and {MAX_OCPD_RATING} A, got {ocpd_rating}."
        )
    for limit, copper, aluminum in _EGC_TABLE:
        if ocpd_rating <= limit:
            return aluminum if metal is Metal.ALUMINUM else copper
    raise AssertionError("unreachable")  # pragma: no cover
