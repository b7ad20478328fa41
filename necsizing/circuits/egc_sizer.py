"""Equipment grounding conductor sizing (NEC 250.122)."""

from __future__ import annotations

import logging

from ..tables.conductors import area_cm, size_for_area
from ..tables.egc import egc_size
from ..tables.sizes import Metal, Size

logger = logging.getLogger(__name__)


def upsized_for_voltage_drop(egc: Size, size_per_ampacity: Size, size_per_voltage_drop: Size) -> Size:
    """250.122(B): increase the EGC in proportion to the phase conductor area.

    The result never exceeds ``size_per_voltage_drop``.
    """
    area = area_cm(egc) * area_cm(size_per_voltage_drop) / area_cm(size_per_ampacity)
    adjusted = size_for_area(area)
    if adjusted is None or adjusted > size_per_voltage_drop:
        return size_per_voltage_drop
    return adjusted


def size_egc(
    ocpd_rating: float,
    metal: Metal,
    size_per_ampacity: Size,
    size_per_voltage_drop: Size,
) -> Size:
    """Return the EGC for ``ocpd_rating``, upsized when voltage drop governed the phase size."""
    egc = egc_size(ocpd_rating, metal)
    if size_per_ampacity < size_per_voltage_drop:
        adjusted = upsized_for_voltage_drop(egc, size_per_ampacity, size_per_voltage_drop)
        logger.debug("EGC %s upsized to %s for voltage drop", egc.value, adjusted.value)
        return adjusted
    return egc
