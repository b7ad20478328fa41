"""Default circuit settings and the helper that merges user overrides onto them."""

from __future__ import annotations

from typing import Dict, Optional

from .errors import ParameterError
from .factors import NECEdition
from .tables.conduits import ConduitType
from .tables.sizes import Insulation, Metal

DEFAULT_CONFIG = {
    "max_voltage_drop_percent": 5.0,
    "ambient_temperature_f": 86.0,
    "length_ft": 100.0,
    "edition": 2014,
    "conductor_insulation": "THW",
    "conductor_metal": "CU",
    "conduit_type": "EMT",
}


def load_config(config: Optional[Dict[str, object]] = None) -> Dict[str, object]:
    merged = dict(DEFAULT_CONFIG)
    if config:
        unknown = sorted(set(config) - set(DEFAULT_CONFIG))
        if unknown:
            raise ParameterError(f"Unknown setting(s): {', '.join(unknown)}.")
        merged.update(config)
    return merged


def edition_of(config: Dict[str, object]) -> NECEdition:
    return NECEdition.from_year(config["edition"])  # type: ignore[arg-type]


def insulation_of(config: Dict[str, object]) -> Insulation:
    return Insulation.from_name(str(config["conductor_insulation"]))


def metal_of(config: Dict[str, object]) -> Metal:
    return Metal.from_symbol(str(config["conductor_metal"]))


def conduit_type_of(config: Dict[str, object]) -> ConduitType:
    return ConduitType.from_label(str(config["conduit_type"]))
