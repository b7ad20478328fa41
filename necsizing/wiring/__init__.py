"""Conductors, cables and the conduits and bundles that contain them."""

from .bundle import Bundle
from .cable import MC_PRESETS, Cable, CableType, mc_cable
from .conductor import Conductor, ConductorSnapshot, Role
from .conduit import Conduit
from .conduitable import Conduitable

__all__ = [
    "Bundle",
    "Cable",
    "CableType",
    "Conductor",
    "ConductorSnapshot",
    "Conduit",
    "Conduitable",
    "MC_PRESETS",
    "Role",
    "mc_cable",
]
