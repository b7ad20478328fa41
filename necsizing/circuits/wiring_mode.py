"""How the conductors or cables of a circuit are installed."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from ..errors import ParameterError
from ..factors import MAX_UNDERATED_LENGTH_IN
from ..tables.conduits import ConduitType, TradeSize
from ..wiring.bundle import Bundle
from ..wiring.conduit import Conduit


class WiringModeKind(Enum):
    PRIVATE_CONDUIT = "PRIVATE CONDUIT"
    SHARED_CONDUIT = "SHARED CONDUIT"
    PRIVATE_BUNDLE = "PRIVATE BUNDLE"
    SHARED_BUNDLE = "SHARED BUNDLE"
    FREE_AIR = "FREE AIR"

    @property
    def uses_conduit(self) -> bool:
        return self in (WiringModeKind.PRIVATE_CONDUIT, WiringModeKind.SHARED_CONDUIT)

    @property
    def uses_bundle(self) -> bool:
        return self in (WiringModeKind.PRIVATE_BUNDLE, WiringModeKind.SHARED_BUNDLE)


@dataclass(frozen=True)
class PrivateConduit:
    """Each of ``conduits`` identical raceways holds an equal share of the sets."""

    conduits: int = 1
    conduit_type: ConduitType = ConduitType.EMT
    minimum_trade_size: TradeSize = TradeSize.T1_2
    nipple: bool = False
    rooftop_distance: float = -1

    kind = WiringModeKind.PRIVATE_CONDUIT

    def __post_init__(self) -> None:
        if self.conduits < 1:
            raise ParameterError(f"Number of conduits must be at least 1, got {self.conduits}.")


@dataclass(frozen=True)
class SharedConduit:
    conduit: Conduit = field(compare=False)

    kind = WiringModeKind.SHARED_CONDUIT


@dataclass(frozen=True)
class PrivateBundle:
    bundling_length: float = MAX_UNDERATED_LENGTH_IN

    kind = WiringModeKind.PRIVATE_BUNDLE

    def __post_init__(self) -> None:
        if self.bundling_length < 0:
            raise ParameterError(f"Bundling length cannot be negative, got {self.bundling_length}.")


@dataclass(frozen=True)
class SharedBundle:
    bundle: Bundle = field(compare=False)

    kind = WiringModeKind.SHARED_BUNDLE


@dataclass(frozen=True)
class FreeAir:
    kind = WiringModeKind.FREE_AIR


WiringMode = Union[PrivateConduit, SharedConduit, PrivateBundle, SharedBundle, FreeAir]
