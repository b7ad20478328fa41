"""Conductor size, metal, insulation and temperature rating enumerations."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Optional

from ..errors import ParameterError


@total_ordering
class Size(Enum):
    """Standard conductor sizes, ordered from smallest to largest."""

    AWG_14 = "14 AWG"
    AWG_12 = "12 AWG"
    AWG_10 = "10 AWG"
    AWG_8 = "8 AWG"
    AWG_6 = "6 AWG"
    AWG_4 = "4 AWG"
    AWG_3 = "3 AWG"
    AWG_2 = "2 AWG"
    AWG_1 = "1 AWG"
    AWG_1_0 = "1/0 AWG"
    AWG_2_0 = "2/0 AWG"
    AWG_3_0 = "3/0 AWG"
    AWG_4_0 = "4/0 AWG"
    KCMIL_250 = "250 KCMIL"
    KCMIL_300 = "300 KCMIL"
    KCMIL_350 = "350 KCMIL"
    KCMIL_400 = "400 KCMIL"
    KCMIL_500 = "500 KCMIL"
    KCMIL_600 = "600 KCMIL"
    KCMIL_700 = "700 KCMIL"
    KCMIL_750 = "750 KCMIL"
    KCMIL_800 = "800 KCMIL"
    KCMIL_900 = "900 KCMIL"
    KCMIL_1000 = "1000 KCMIL"
    KCMIL_1250 = "1250 KCMIL"
    KCMIL_1500 = "1500 KCMIL"
    KCMIL_1750 = "1750 KCMIL"
    KCMIL_2000 = "2000 KCMIL"

    @property
    def index(self) -> int:
        return _SIZE_ORDER[self]

    @property
    def name_text(self) -> str:
        return self.value

    @property
    def number(self) -> str:
        """Size without the unit, e.g. ``"1/0"`` or ``"250"``."""
        return self.value.split(" ")[0]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.index < other.index

    def next_size_up(self) -> Optional["Size"]:
        """Return the next larger size, or ``None`` at the top of the table."""
        idx = self.index + 1
        return _SIZES[idx] if idx < len(_SIZES) else None

    def next_size_down(self) -> Optional["Size"]:
        idx = self.index - 1
        return _SIZES[idx] if idx >= 0 else None

    @classmethod
    def from_name(cls, text: str) -> "Size":
        cleaned = text.strip().upper().lstrip("#")
        for size in cls:
            if cleaned in (size.value, size.number):
                return size
        raise ParameterError(f"Unknown conductor size '{text}'.")


_SIZES = list(Size)
_SIZE_ORDER = {size: idx for idx, size in enumerate(_SIZES)}


def biggest(*sizes: Optional[Size]) -> Optional[Size]:
    """Return the largest of the given sizes, ignoring ``None`` entries."""
    present = [size for size in sizes if size is not None]
    return max(present) if present else None


class TempRating(Enum):
    UNKNOWN = 0
    T60 = 60
    T75 = 75
    T90 = 90

    @property
    def celsius(self) -> int:
        return self.value

    @property
    def fahrenheit(self) -> int:
        return 0 if self is TempRating.UNKNOWN else round(1.8 * self.value + 32)

    @staticmethod
    def min_of(first: "TempRating", second: "TempRating") -> "TempRating":
        return first if first.value <= second.value else second


class Metal(Enum):
    COPPER = "CU"
    ALUMINUM = "AL"
    COPPER_COATED = "CU COATED"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_copper(self) -> bool:
        return self is not Metal.ALUMINUM

    @classmethod
    def from_symbol(cls, text: str) -> "Metal":
        cleaned = text.strip().upper().replace("_", " ")
        for metal in cls:
            if cleaned in (metal.value, metal.name.replace("_", " ")):
                return metal
        raise ParameterError(f"Unknown conductor metal '{text}'.")


class Location(Enum):
    DRY = "DRY"
    DAMP = "DAMP"
    WET = "WET"


class Insulation(Enum):
    TW = "TW"
    THW = "THW"
    THHW = "THHW"
    THW2 = "THW-2"
    RHW = "RHW"
    RHH = "RHH"
    RHW2 = "RHW-2"
    THWN = "THWN"
    THHN = "THHN"
    THWN2 = "THWN-2"
    USE = "USE"
    USE2 = "USE-2"
    ZW = "ZW"
    ZW2 = "ZW-2"
    FEP = "FEP"
    FEPB = "FEPB"
    XHH = "XHH"
    XHHW = "XHHW"
    XHHW2 = "XHHW-2"
    TBS = "TBS"
    SA = "SA"
    SIS = "SIS"
    MI = "MI"

    def temp_rating(self, location: Location = Location.DRY) -> TempRating:
        """Temperature rating per Table 310.104(A) for the given location."""
        if location is Location.WET and self in (Insulation.THHW, Insulation.XHHW):
            return TempRating.T75
        return _INSULATION_RATING[self]

    @classmethod
    def from_name(cls, text: str) -> "Insulation":
        cleaned = text.strip().upper()
        for insulation in cls:
            if cleaned in (insulation.value, insulation.name):
                return insulation
        raise ParameterError(f"Unknown insulation '{text}'.")


_INSULATION_RATING = {
    Insulation.TW: TempRating.T60,
    Insulation.RHW: TempRating.T75,
    Insulation.THW: TempRating.T75,
    Insulation.THWN: TempRating.T75,
    Insulation.USE: TempRating.T75,
    Insulation.ZW: TempRating.T75,
}
for _insulation in Insulation:
    _INSULATION_RATING.setdefault(_insulation, TempRating.T90)
