"""Circuit sizing orchestration."""

from .circuit import MAX_SETS, Circuit, CircuitResult, possible_conduit_counts
from .egc_sizer import size_egc
from .ocpd_rules import OCPDContext, resolve_ocpd_rating
from .wiring_mode import (
    FreeAir,
    PrivateBundle,
    PrivateConduit,
    SharedBundle,
    SharedConduit,
    WiringMode,
    WiringModeKind,
)

__all__ = [
    "Circuit",
    "CircuitResult",
    "FreeAir",
    "MAX_SETS",
    "OCPDContext",
    "PrivateBundle",
    "PrivateConduit",
    "SharedBundle",
    "SharedConduit",
    "WiringMode",
    "WiringModeKind",
    "possible_conduit_counts",
    "resolve_ocpd_rating",
    "size_egc",
]
