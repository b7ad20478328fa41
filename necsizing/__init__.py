"""NEC conductor, OCPD and EGC sizing engine public interface with lazy imports."""
from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - import-time helpers for type checkers
    from .circuits import (
        Circuit,
        CircuitResult,
        FreeAir,
        PrivateBundle,
        PrivateConduit,
        SharedBundle,
        SharedConduit,
    )
    from .config import DEFAULT_CONFIG, load_config
    from .errors import (
        CircuitDefinitionError,
        NECSizingError,
        OwnershipError,
        ParameterError,
        TableLookupError,
    )
    from .factors import NECEdition
    from .loads import CircuitType, GeneralLoad
    from .messages import ResultMessage, ResultMessages
    from .schema import load_circuits, load_circuits_file
    from .systems import VoltageAC
    from .tables import ConduitType, Insulation, Metal, Size, TempRating, TradeSize
    from .voltage_drop import voltage_drop_percent
    from .wiring import Bundle, Cable, CableType, Conductor, Conduit, Role

_EXPORTS = {
    "Circuit": "circuits",
    "CircuitResult": "circuits",
    "FreeAir": "circuits",
    "PrivateBundle": "circuits",
    "PrivateConduit": "circuits",
    "SharedBundle": "circuits",
    "SharedConduit": "circuits",
    "DEFAULT_CONFIG": "config",
    "load_config": "config",
    "CircuitDefinitionError": "errors",
    "NECSizingError": "errors",
    "OwnershipError": "errors",
    "ParameterError": "errors",
    "TableLookupError": "errors",
    "NECEdition": "factors",
    "CircuitType": "loads",
    "GeneralLoad": "loads",
    "ResultMessage": "messages",
    "ResultMessages": "messages",
    "load_circuits": "schema",
    "load_circuits_file": "schema",
    "VoltageAC": "systems",
    "ConduitType": "tables",
    "Insulation": "tables",
    "Metal": "tables",
    "Size": "tables",
    "TempRating": "tables",
    "TradeSize": "tables",
    "voltage_drop_percent": "voltage_drop",
    "Bundle": "wiring",
    "Cable": "wiring",
    "CableType": "wiring",
    "Conductor": "wiring",
    "Conduit": "wiring",
    "Role": "wiring",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(name)
    return getattr(import_module(f".{module}", __name__), name)


def __dir__() -> list[str]:  # pragma: no cover - interactive helper
    return sorted(__all__)
