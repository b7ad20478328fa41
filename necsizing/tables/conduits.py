"""Conduit types, trade sizes and Chapter 9 Table 4 areas."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache, total_ordering
from typing import Dict, List, Optional

from ..errors import ParameterError, TableLookupError


class OuterMaterial(Enum):
    PVC = "PVC"
    STEEL = "STEEL"
    ALUMINUM = "ALUMINUM"

    @property
    def is_magnetic(self) -> bool:
        return self is OuterMaterial.STEEL


@total_ordering
class TradeSize(Enum):
    T3_8 = "3/8"
    T1_2 = "1/2"
    T3_4 = "3/4"
    T1 = "1"
    T1_1_4 = "1-1/4"
    T1_1_2 = "1-1/2"
    T2 = "2"
    T2_1_2 = "2-1/2"
    T3 = "3"
    T3_1_2 = "3-1/2"
    T4 = "4"
    T5 = "5"
    T6 = "6"

    @property
    def label(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TradeSize):
            return NotImplemented
        return _TRADE_ORDER[self] < _TRADE_ORDER[other]

    @classmethod
    def from_label(cls, text: str) -> "TradeSize":
        cleaned = text.strip().replace('"', "").replace(" ", "-")
        for trade in cls:
            if cleaned in (trade.value, trade.name):
                return trade
        raise ParameterError(f"Unknown trade size '{text}'.")


_TRADE_ORDER = {trade: idx for idx, trade in enumerate(TradeSize)}


class ConduitType(Enum):
    EMT = "EMT"
    IMC = "IMC"
    RMC = "RMC"
    PVC40 = "PVC-40"
    PVC80 = "PVC-80"
    FMC = "FMC"
    LFMC = "LFMC"
    ENT = "ENT"
    LFNCA = "LFNC-A"
    LFNCB = "LFNC-B"
    HDPE = "HDPE"
    PVCA = "PVC-A"
    PVCEB = "PVC-EB"
    EMTAL = "EMT-AL"
    FMCAL = "FMC-AL"
    LFMCAL = "LFMC-AL"
    RMCAL = "RMC-AL"

    @property
    def label(self) -> str:
        return self.value

    @property
    def material(self) -> OuterMaterial:
        return material_of(self)

    @classmethod
    def from_label(cls, text: str) -> "ConduitType":
        cleaned = text.strip().upper()
        for conduit_type in cls:
            if cleaned in (conduit_type.value, conduit_type.name):
                return conduit_type
        raise ParameterError(f"Unknown conduit type '{text}'.")


_STEEL = {ConduitType.EMT, ConduitType.FMC, ConduitType.IMC, ConduitType.LFMC, ConduitType.RMC}
_ALUMINUM = {ConduitType.EMTAL, ConduitType.FMCAL, ConduitType.LFMCAL, ConduitType.RMCAL}


def material_of(conduit_type: ConduitType) -> OuterMaterial:
    if conduit_type in _ALUMINUM:
        return OuterMaterial.ALUMINUM
    if conduit_type in _STEEL:
        return OuterMaterial.STEEL
    return OuterMaterial.PVC


_T = TradeSize
_HALF_TO_FOUR = [_T.T1_2, _T.T3_4, _T.T1, _T.T1_1_4, _T.T1_1_2, _T.T2, _T.T2_1_2, _T.T3, _T.T3_1_2, _T.T4]
_HALF_TO_TWO = _HALF_TO_FOUR[:6]
_HALF_TO_SIX = _HALF_TO_FOUR + [_T.T5, _T.T6]

# Chapter 9 Table 4, 100 % internal area in square inches.
_PVC40_AREAS = [.285, .508, .832, 1.453, 1.986, 3.291, 4.695, 7.268, 9.737, 12.554, 19.761, 28.567]
_LFMC_AREAS = [.192, .314, .541, .873, 1.528, 1.981, 3.246, 4.881, 7.475, 9.731, 12.692]
_FMC_AREAS = [.116, .317, .533, .817, 1.277, 1.858, 3.269, 4.909, 7.069, 9.621, 12.566]
_EMT_AREAS = [.304, .533, .864, 1.496, 2.036, 3.356, 5.858, 8.846, 11.545, 14.753]
_RMC_AREAS = [.314, .549, .887, 1.526, 2.071, 3.408, 4.866, 7.499, 10.01, 12.882, 20.212, 29.158]

_TABLE4 = {
    ConduitType.EMT: (_HALF_TO_FOUR, _EMT_AREAS),
    ConduitType.ENT: (_HALF_TO_TWO, [.285, .508, .832, 1.453, 1.986, 3.291]),
    ConduitType.FMC: ([_T.T3_8] + _HALF_TO_FOUR, _FMC_AREAS),
    ConduitType.IMC: (_HALF_TO_FOUR, [.342, .586, .959, 1.647, 2.225, 3.63, 5.135, 7.922, 10.584, 13.631]),
    ConduitType.LFNCA: ([_T.T3_8] + _HALF_TO_TWO, [.192, .312, .535, .854, 1.502, 2.018, 3.343]),
    ConduitType.LFNCB: ([_T.T3_8] + _HALF_TO_TWO, [.192, .314, .541, .873, 1.528, 1.981, 3.246]),
    ConduitType.LFMC: ([_T.T3_8] + _HALF_TO_FOUR, _LFMC_AREAS),
    ConduitType.RMC: (_HALF_TO_SIX, _RMC_AREAS),
    ConduitType.PVC80: (_HALF_TO_SIX, [.217, .409, .688, 1.237, 1.711, 2.874, 4.119, 6.442, 8.688, 11.258, 17.855, 25.598]),
    ConduitType.PVC40: (_HALF_TO_SIX, _PVC40_AREAS),
    ConduitType.HDPE: (_HALF_TO_SIX, _PVC40_AREAS),
    ConduitType.PVCA: (_HALF_TO_FOUR, [.385, .65, 1.084, 1.767, 2.324, 3.647, 5.453, 8.194, 10.694, 13.723]),
    ConduitType.PVCEB: ([_T.T2, _T.T3, _T.T3_1_2, _T.T4, _T.T5, _T.T6], [3.874, 8.709, 11.365, 14.448, 22.195, 31.53]),
    ConduitType.EMTAL: (_HALF_TO_FOUR, _EMT_AREAS),
    ConduitType.FMCAL: ([_T.T3_8] + _HALF_TO_FOUR, _FMC_AREAS),
    ConduitType.LFMCAL: ([_T.T3_8] + _HALF_TO_FOUR, _LFMC_AREAS),
    ConduitType.RMCAL: (_HALF_TO_SIX, _RMC_AREAS),
}


@lru_cache(maxsize=None)
def _area_table(conduit_type: ConduitType) -> Dict[TradeSize, float]:
    trades, areas = _TABLE4[conduit_type]
    return dict(zip(trades, areas))


def trade_sizes_for(conduit_type: ConduitType) -> List[TradeSize]:
    return sorted(_area_table(conduit_type))


def has_trade_size(conduit_type: ConduitType, trade_size: TradeSize) -> bool:
    return trade_size in _area_table(conduit_type)


def area_in2(conduit_type: ConduitType, trade_size: TradeSize) -> float:
    """Return the total internal area of a conduit in square inches."""
    try:
        return _area_table(conduit_type)[trade_size]
    except KeyError as exc:
        raise TableLookupError(f"No Table 4 area for {conduit_type.label} trade size {trade_size.label}.") from exc


def trade_size_for_area(
    area: float,
    conduit_type: ConduitType,
    minimum_trade: TradeSize = TradeSize.T1_2,
) -> Optional[TradeSize]:
    """Return the smallest trade size not below ``minimum_trade`` whose area is at least ``area``."""
    for trade in trade_sizes_for(conduit_type):
        if trade < minimum_trade:
            continue
        if _area_table(conduit_type)[trade] >= area:
            return trade
    return None
