"""Embedded NEC lookup tables."""

from .conduits import ConduitType, OuterMaterial, TradeSize
from .ocpd import OCPDType, STANDARD_RATINGS
from .sizes import Insulation, Location, Metal, Size, TempRating, biggest

__all__ = [
    "ConduitType",
    "Insulation",
    "Location",
    "Metal",
    "OCPDType",
    "OuterMaterial",
    "STANDARD_RATINGS",
    "Size",
    "TempRating",
    "TradeSize",
    "biggest",
]
