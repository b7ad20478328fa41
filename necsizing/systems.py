"""AC voltage system configurations."""

from __future__ import annotations

from enum import Enum
from math import sqrt

from .errors import ParameterError


class VoltageAC(Enum):
    """Voltage, phase count and wire count of an AC system.

    ``V208_1PH_2WN`` is one hot and the neutral of a 208Y/120 V high-leg
    arrangement, so it behaves as hot plus neutral.
    """

    V120_1PH_2W = ("120v 1Ø 2W", 120, 1, 2)
    V208_1PH_2W = ("208v 1Ø 2W", 208, 1, 2)
    V208_1PH_2WN = ("208v 1Ø 2W (high leg)", 208, 1, 2)
    V208_1PH_3W = ("208v 1Ø 3W", 208, 1, 3)
    V208_3PH_3W = ("208v 3Ø 3W", 208, 3, 3)
    V208_3PH_4W = ("208v 3Ø 4W", 208, 3, 4)
    V240_1PH_2W = ("240v 1Ø 2W", 240, 1, 2)
    V240_1PH_3W = ("240v 1Ø 3W", 240, 1, 3)
    V240_3PH_3W = ("240v 3Ø 3W", 240, 3, 3)
    V240_3PH_4W = ("240v 3Ø 4W", 240, 3, 4)
    V277_1PH_2W = ("277v 1Ø 2W", 277, 1, 2)
    V480_1PH_2W = ("480v 1Ø 2W", 480, 1, 2)
    V480_1PH_3W = ("480v 1Ø 3W", 480, 1, 3)
    V480_3PH_3W = ("480v 3Ø 3W", 480, 3, 3)
    V480_3PH_4W = ("480v 3Ø 4W", 480, 3, 4)
    V575_3PH_3W = ("575v 3Ø 3W", 575, 3, 3)

    def __init__(self, label: str, voltage: int, phases: int, wires: int) -> None:
        self.label = label
        self.voltage = voltage
        self.phases = phases
        self.wires = wires

    @property
    def factor(self) -> float:
        return sqrt(self.phases)

    @property
    def is_high_leg(self) -> bool:
        return self is VoltageAC.V208_1PH_2WN

    @property
    def has_neutral(self) -> bool:
        return self not in _NO_NEUTRAL

    @property
    def has_hot_and_neutral_only(self) -> bool:
        return self in (VoltageAC.V120_1PH_2W, VoltageAC.V277_1PH_2W, VoltageAC.V208_1PH_2WN)

    @property
    def has_two_hots_only(self) -> bool:
        return self in (VoltageAC.V208_1PH_2W, VoltageAC.V240_1PH_2W, VoltageAC.V480_1PH_2W)

    @property
    def has_two_hots_and_neutral_only(self) -> bool:
        return self.phases == 1 and self.wires == 3

    @property
    def hot_count(self) -> int:
        if self.phases == 3:
            return 3
        if self.has_hot_and_neutral_only:
            return 1
        return 2

    @classmethod
    def from_label(cls, text: str) -> "VoltageAC":
        cleaned = text.strip()
        for system in cls:
            if cleaned in (system.label, system.name, system.name.lower()):
                return system
        raise ParameterError(f"Unknown voltage system '{text}'.")


_NO_NEUTRAL = frozenset(
    {
        VoltageAC.V208_1PH_2W,
        VoltageAC.V208_3PH_3W,
        VoltageAC.V240_1PH_2W,
        VoltageAC.V240_3PH_3W,
        VoltageAC.V480_1PH_2W,
        VoltageAC.V480_3PH_3W,
        VoltageAC.V575_3PH_3W,
    }
)
