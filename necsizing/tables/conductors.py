"""Conductor property tables: NEC 310.16 ampacity and Chapter 9 Tables 5, 5A, 8 and 9."""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, NamedTuple, Optional

from ..errors import ParameterError, TableLookupError
from .conduits import OuterMaterial
from .sizes import Insulation, Metal, Size, TempRating


class ConductorProperties(NamedTuple):
    cu_amp_60: int
    cu_amp_75: int
    cu_amp_90: int
    al_amp_60: int
    al_amp_75: int
    al_amp_90: int
    reactance_non_magnetic: float
    reactance_magnetic: float
    cu_res_pvc: float
    cu_res_al: float
    cu_res_steel: float
    al_res_pvc: float
    al_res_al: float
    al_res_steel: float
    area_cm: int
    cu_res_dc: float
    cu_res_dc_coated: float
    al_res_dc: float


_P = ConductorProperties

# Table 310.16 ampacities, Table 9 reactance/AC resistance (ohm/kft) and Table 8 data.
_PROPERTIES: Dict[Size, ConductorProperties] = {
    Size.AWG_14: _P(15, 20, 25, 0, 0, 0, .058, .073, 3.1, 3.1, 3.1, 4.1306, 4.1306, 4.1306, 4110, 3.07, 3.19, 5.06),
    Size.AWG_12: _P(20, 25, 30, 15, 20, 25, .054, .068, 2, 2, 2, 3.2, 3.2, 3.2, 6530, 1.93, 2.01, 3.18),
    Size.AWG_10: _P(30, 35, 40, 25, 30, 35, .054, .068, 1.2, 1.2, 1.2, 2, 2, 2, 10380, 1.21, 1.26, 2.0),
    Size.AWG_8: _P(40, 50, 55, 35, 40, 45, .05, .063, .78, .78, .78, 1.3, 1.3, 1.3, 16510, .764, .786, 1.26),
    Size.AWG_6: _P(55, 65, 75, 40, 50, 55, .051, .064, .49, .49, .49, .81, .81, .81, 26240, .491, .51, .808),
    Size.AWG_4: _P(70, 85, 95, 55, 65, 75, .048, .06, .31, .31, .31, .51, .51, .51, 41740, .308, .321, .508),
    Size.AWG_3: _P(85, 100, 115, 65, 75, 85, .047, .059, .25, .25, .25, .40, .41, .40, 52620, .245, .254, .403),
    Size.AWG_2: _P(95, 115, 130, 75, 90, 100, .045, .057, .19, .2, .2, .32, .32, .32, 66360, .194, .201, .319),
    Size.AWG_1: _P(110, 130, 145, 85, 100, 115, .046, .057, .15, .16, .16, .25, .26, .25, 83690, .154, .16, .253),
    Size.AWG_1_0: _P(125, 150, 170, 100, 120, 135, .044, .055, .12, .13, .12, .2, .21, .2, 105600, .122, .127, .201),
    Size.AWG_2_0: _P(145, 175, 195, 115, 135, 150, .043, .054, .1, .1, .1, .16, .16, .16, 133100, .0967, .101, .159),
    Size.AWG_3_0: _P(165, 200, 225, 130, 155, 175, .042, .052, .077, .082, .079, .13, .13, .13, 167800, .0766, .0797, .126),
    Size.AWG_4_0: _P(195, 230, 260, 150, 180, 205, .041, .051, .062, .067, .063, .1, .11, .1, 211600, .0608, .0626, .1),
    Size.KCMIL_250: _P(215, 255, 290, 170, 205, 230, .041, .052, .052, .057, .054, .085, .09, .086, 250000, .0515, .0535, .0847),
    Size.KCMIL_300: _P(240, 285, 320, 195, 230, 260, .041, .051, .044, .049, .045, .071, .076, .072, 300000, .0429, .0446, .0707),
    Size.KCMIL_350: _P(260, 310, 350, 210, 250, 280, .04, .05, .038, .043, .039, .061, .066, .063, 350000, .0367, .0382, .0605),
    Size.KCMIL_400: _P(280, 335, 380, 225, 270, 305, .04, .049, .033, .038, .035, .054, .059, .055, 400000, .0321, .0331, .0529),
    Size.KCMIL_500: _P(320, 380, 430, 260, 310, 350, .039, .048, .027, .032, .029, .043, .048, .045, 500000, .0258, .0265, .0424),
    Size.KCMIL_600: _P(350, 420, 475, 285, 340, 385, .039, .048, .023, .028, .025, .036, .041, .038, 600000, .0214, .0223, .0353),
    Size.KCMIL_700: _P(385, 460, 520, 315, 375, 425, .0385, .048, .021, .026, .0219, .0325, .038, .0337, 700000, .0184, .0189, .0303),
    Size.KCMIL_750: _P(400, 475, 535, 320, 385, 435, .038, .048, .019, .024, .021, .029, .034, .031, 750000, .0171, .0176, .0282),
    Size.KCMIL_800: _P(410, 490, 555, 330, 395, 445, .0378, .0476, .0182, .023, .0204, .0278, .0326, .0298, 800000, .0161, .0166, .0265),
    Size.KCMIL_900: _P(435, 520, 585, 355, 425, 480, .0374, .0468, .0166, .021, .0192, .0254, .0298, .0274, 900000, .0143, .0147, .0235),
    Size.KCMIL_1000: _P(455, 545, 615, 375, 445, 500, .037, .046, .015, .019, .018, .023, .027, .025, 1000000, .0129, .0132, .0212),
    Size.KCMIL_1250: _P(495, 590, 665, 405, 485, 545, .036, .046, .011351, .014523, .014523, .0177, .023436, .0216, 1250000, .0103, .0106, .0169),
    Size.KCMIL_1500: _P(525, 625, 705, 435, 520, 585, .035, .045, .009798, .013127, .013127, .015, .020941, .0193, 1500000, .00858, .00883, .0141),
    Size.KCMIL_1750: _P(545, 650, 735, 455, 545, 615, .034, .045, .00871, .012275, .012275, .0131, .019205, .0177, 1750000, .00735, .00756, .0121),
    Size.KCMIL_2000: _P(555, 665, 750, 470, 560, 630, .034, .044, .007928, .011703, .011703, .0117, .018011, .0166, 2000000, .00643, .00662, .0106),
}

# Chapter 9 Table 5, approximate area of insulated conductors (in^2), from 14 AWG upward.
_TABLE5_TW = [
    .0139, .0181, .0243, .0437, .0726, .0973, .1134, .1333, .1901, .2223, .2624, .3117, .3718, .4596,
    .5281, .5958, .6619, .7901, .9729, 1.101, 1.1652, 1.2272, 1.3561, 1.4784, 1.8602, 2.1695, 2.4773, 2.7818,
]
_TABLE5_RHW = [
    .0293, .0353, .0437, .0835, .1041, .1333, .1521, .175, .266, .3039, .3505, .4072, .4754, .6291,
    .7088, .787, .8626, 1.0082, 1.2135, 1.3561, 1.4272, 1.4957, 1.6377, 1.7719, 2.3479, 2.6938, 3.0357, 3.3719,
]
_TABLE5_THWN = [
    .0097, .0133, .0211, .0366, .0507, .0824, .0973, .1158, .1562, .1855, .2223, .2679, .3237, .397,
    .4608, .5242, .5863, .7073, .8676, .9887, 1.0496, 1.1085, 1.2311, 1.3478,
]
_TABLE5_ZW = [.0139, .0181, .0243, .0437, .059, .0814, .0962, .1146]
_TABLE5_FEP = [.01, .0137, .0191, .0333, .0468, .067, .0804, .0973]
_TABLE5_XHH = [
    .0139, .0181, .0243, .0437, .059, .0814, .0962, .1146, .1534, .1825, .219, .2642, .3197, .3904,
    .4536, .5166, .5782, .6984, .8709, .9923, 1.0532, 1.1122, 1.2351, 1.3519, 1.718, 2.0156, 2.3127, 2.6073,
]

_TABLE5_GROUPS = {
    Insulation.TW: _TABLE5_TW,
    Insulation.THW: _TABLE5_TW,
    Insulation.THHW: _TABLE5_TW,
    Insulation.THW2: _TABLE5_TW,
    Insulation.RHW: _TABLE5_RHW,
    Insulation.RHH: _TABLE5_RHW,
    Insulation.RHW2: _TABLE5_RHW,
    Insulation.THWN: _TABLE5_THWN,
    Insulation.THHN: _TABLE5_THWN,
    Insulation.THWN2: _TABLE5_THWN,
    Insulation.ZW: _TABLE5_ZW,
    Insulation.FEP: _TABLE5_FEP,
    Insulation.FEPB: _TABLE5_FEP,
    Insulation.XHH: _TABLE5_XHH,
    Insulation.XHHW: _TABLE5_XHH,
    Insulation.XHHW2: _TABLE5_XHH,
}

# Chapter 9 Table 5A, compact conductors.
_TABLE5A_SIZES = [
    Size.AWG_8, Size.AWG_6, Size.AWG_4, Size.AWG_2, Size.AWG_1, Size.AWG_1_0, Size.AWG_2_0,
    Size.AWG_3_0, Size.AWG_4_0, Size.KCMIL_250, Size.KCMIL_300, Size.KCMIL_350, Size.KCMIL_400,
    Size.KCMIL_500, Size.KCMIL_600, Size.KCMIL_700, Size.KCMIL_750, Size.KCMIL_900, Size.KCMIL_1000,
]
_TABLE5A_RHH = [
    .0531, .0683, .0881, .1194, .1698, .1963, .229, .2733, .3217, .4015, .4596, .5153, .5741, .6793,
    .8413, .9503, 1.0118, 1.2076, 1.2968,
]
_TABLE5A_THW = [
    .051, .066, .0881, .1194, .1698, .1963, .2332, .2733, .3267, .4128, .4717, .5281, .5876, .6939,
    .8659, .9676, 1.0386, 1.1766, 1.2968,
]
_TABLE5A_THHN = [
    .0452, .073, .1017, .1352, .159, .1924, .229, .278, .3525, .4071, .4656, .5216, .6151, .762,
    .8659, .9076, 1.1196, 1.237,
]
_TABLE5A_XHHW = [
    .0394, .053, .073, .1017, .1352, .159, .1885, .229, .2733, .3421, .4015, .4536, .5026, .6082,
    .7542, .8659, .9331, 1.0733, 1.1882,
]
_TABLE5A_BARE = [
    .0141, .0224, .0356, .0564, .0702, .0887, .111, .1405, .1772, .2124, .2552, .298, .3411, .4254,
    .5191, .6041, .6475, .7838, .8825,
]

_TABLE5A_GROUPS = {
    Insulation.RHH: (_TABLE5A_SIZES, _TABLE5A_RHH),
    Insulation.RHW: (_TABLE5A_SIZES, _TABLE5A_RHH),
    Insulation.USE: (_TABLE5A_SIZES, _TABLE5A_RHH),
    Insulation.THW: (_TABLE5A_SIZES, _TABLE5A_THW),
    Insulation.THHW: (_TABLE5A_SIZES, _TABLE5A_THW),
    Insulation.THHN: (_TABLE5A_SIZES[1:], _TABLE5A_THHN),
    Insulation.XHHW: (_TABLE5A_SIZES, _TABLE5A_XHHW),
}


@lru_cache(maxsize=None)
def _insulated_area_table(insulation: Insulation) -> Dict[Size, float]:
    values = _TABLE5_GROUPS.get(insulation, [])
    return dict(zip(Size, values))


@lru_cache(maxsize=None)
def _compact_area_table(insulation: Insulation) -> Dict[Size, float]:
    sizes, values = _TABLE5A_GROUPS.get(insulation, ([], []))
    return dict(zip(sizes, values))


def properties(size: Size) -> ConductorProperties:
    return _PROPERTIES[size]


def standard_ampacity(size: Size, metal: Metal, temp_rating: TempRating) -> int:
    """Return the Table 310.16 ampacity (30 °C ambient, not more than three CCC)."""
    props = _PROPERTIES[size]
    if temp_rating is TempRating.UNKNOWN:
        raise TableLookupError("No 310.16 column for an unknown temperature rating.")
    if metal is Metal.ALUMINUM:
        columns = (props.al_amp_60, props.al_amp_75, props.al_amp_90)
    else:
        columns = (props.cu_amp_60, props.cu_amp_75, props.cu_amp_90)
    return columns[(TempRating.T60, TempRating.T75, TempRating.T90).index(temp_rating)]


def size_for_current(current: float, metal: Metal, temp_rating: TempRating) -> Optional[Size]:
    """Return the smallest size whose standard ampacity is at least ``current``."""
    if current <= 0:
        raise ParameterError(f"Current must be positive, got {current}.")
    for size in Size:
        if standard_ampacity(size, metal, temp_rating) >= current:
            return size
    return None


def area_cm(size: Size) -> int:
    """Conductor area in circular mils."""
    return _PROPERTIES[size].area_cm


def size_for_area(area: float) -> Optional[Size]:
    """Return the smallest size whose circular-mil area is at least ``area``."""
    if area <= 0:
        raise ParameterError(f"Area must be positive, got {area}.")
    for size in Size:
        if _PROPERTIES[size].area_cm >= area:
            return size
    return None


def has_insulated_area(size: Size, insulation: Insulation) -> bool:
    return size in _insulated_area_table(insulation)


def insulated_area_in2(size: Size, insulation: Insulation) -> float:
    """Return the Table 5 area of an insulated conductor in square inches."""
    try:
        return _insulated_area_table(insulation)[size]
    except KeyError as exc:
        raise TableLookupError(f"No Table 5 area for {size.value} {insulation.value}.") from exc


def compact_area_in2(size: Size, insulation: Insulation) -> Optional[float]:
    """Return the Table 5A compact-conductor area, or ``None`` when not listed."""
    return _compact_area_table(insulation).get(size)


def bare_compact_area_in2(size: Size) -> Optional[float]:
    return dict(zip(_TABLE5A_SIZES, _TABLE5A_BARE)).get(size)


def ac_resistance(size: Size, metal: Metal, material: Optional[OuterMaterial] = None) -> float:
    """Table 9 AC resistance in ohm/kft; no outer material means PVC."""
    props = _PROPERTIES[size]
    material = material or OuterMaterial.PVC
    if metal is Metal.ALUMINUM:
        columns = {
            OuterMaterial.PVC: props.al_res_pvc,
            OuterMaterial.ALUMINUM: props.al_res_al,
            OuterMaterial.STEEL: props.al_res_steel,
        }
    else:
        columns = {
            OuterMaterial.PVC: props.cu_res_pvc,
            OuterMaterial.ALUMINUM: props.cu_res_al,
            OuterMaterial.STEEL: props.cu_res_steel,
        }
    return columns[material]


def reactance(size: Size, magnetic: bool) -> float:
    """Table 9 inductive reactance in ohm/kft."""
    props = _PROPERTIES[size]
    return props.reactance_magnetic if magnetic else props.reactance_non_magnetic


def _check_run(length_ft: float, sets: int) -> None:
    if length_ft <= 0:
        raise ParameterError(f"Length must be positive, got {length_ft}.")
    if sets <= 0:
        raise ParameterError(f"Number of sets must be positive, got {sets}.")


def ac_resistance_total(
    size: Size,
    metal: Metal,
    material: Optional[OuterMaterial],
    length_ft: float,
    sets: int = 1,
) -> float:
    """Total AC resistance in ohms of ``sets`` paralleled conductors over ``length_ft``."""
    _check_run(length_ft, sets)
    return ac_resistance(size, metal, material) * 0.001 * length_ft / sets


def reactance_total(size: Size, magnetic: bool, length_ft: float, sets: int = 1) -> float:
    _check_run(length_ft, sets)
    return reactance(size, magnetic) * 0.001 * length_ft / sets


def dc_resistance(size: Size, metal: Metal) -> float:
    """Table 8 DC resistance in ohm/kft at 75 °C."""
    props = _PROPERTIES[size]
    if metal is Metal.ALUMINUM:
        return props.al_res_dc
    if metal is Metal.COPPER_COATED:
        return props.cu_res_dc_coated
    return props.cu_res_dc
