"""Multi-conductor cables (AC, MC, NM, NMC and NMS)."""

from __future__ import annotations

from enum import Enum
from math import pi
from typing import Dict, Optional, Tuple

from ..errors import OwnershipError, ParameterError
from ..factors import (
    DEFAULT_EDITION,
    NECEdition,
    adjustment_factor_for_count,
    cable_bundle_adjustment_factor,
)
from ..systems import VoltageAC
from ..tables.conduits import OuterMaterial
from ..tables.sizes import Insulation, Metal, Size, TempRating
from .conductor import Conductor, Role
from .conduitable import Conduitable

MINIMUM_OUTER_DIAMETER = 0.5


class CableType(Enum):
    AC = "AC"
    MC = "MC"
    NM = "NM"
    NMC = "NMC"
    NMS = "NMS"

    @property
    def outer_material(self) -> OuterMaterial:
        if self in (CableType.AC, CableType.MC):
            return OuterMaterial.STEEL
        return OuterMaterial.PVC

    @property
    def is_armored(self) -> bool:
        return self in (CableType.AC, CableType.MC)


class Cable(Conduitable):
    """A cable made of up to three phase conductors, a neutral and a grounding conductor.

    The voltage system decides which conductors exist: phase B for two-hot
    and three-phase systems, phase C for three-phase systems and a neutral
    whenever the system has one.
    """

    def __init__(
        self,
        voltage: VoltageAC,
        cable_type: CableType = CableType.MC,
        outer_diameter: float = MINIMUM_OUTER_DIAMETER,
        jacketed: bool = False,
        length: float = 100,
        ambient_temperature_f: float = 86,
        rooftop_distance: float = -1,
        edition: NECEdition = DEFAULT_EDITION,
    ) -> None:
        super().__init__(length, ambient_temperature_f, rooftop_distance, edition)
        self._voltage = voltage
        self._type = cable_type
        self._outer_diameter = max(outer_diameter, MINIMUM_OUTER_DIAMETER)
        self._jacketed = jacketed
        self._phase_a = Conductor()
        self._phase_b: Optional[Conductor] = None
        self._phase_c: Optional[Conductor] = None
        self._neutral: Optional[Conductor] = None
        if voltage.has_two_hots_only or voltage.has_two_hots_and_neutral_only or voltage.phases == 3:
            self._phase_b = Conductor()
        if voltage.phases == 3:
            self._phase_c = Conductor()
        if voltage.has_neutral:
            self._neutral = Conductor(role=Role.NEUNCC if voltage.wires == 4 else Role.NEUCC)
        self._ground = Conductor(role=Role.GND)

    # -- composition -------------------------------------------------------
    @property
    def voltage(self) -> VoltageAC:
        return self._voltage

    @property
    def has_neutral(self) -> bool:
        return self._neutral is not None

    def _phases(self) -> Tuple[Conductor, ...]:
        return tuple(c for c in (self._phase_a, self._phase_b, self._phase_c) if c is not None)

    @property
    def hot_count(self) -> int:
        return len(self._phases())

    @property
    def phase_conductor(self) -> Conductor:
        return self._phase_a.copy()

    @property
    def neutral_conductor(self) -> Optional[Conductor]:
        return self._neutral.copy() if self._neutral is not None else None

    @property
    def grounding_conductor(self) -> Conductor:
        return self._ground.copy()

    def _require_neutral(self) -> Conductor:
        if self._neutral is None:
            raise OwnershipError(f"A {self._voltage.label} cable does not have a neutral conductor.")
        return self._neutral

    # -- conductor setters -------------------------------------------------
    @property
    def size(self) -> Size:
        return self._phase_a.size

    @property
    def phase_conductor_size(self) -> Size:
        return self._phase_a.size

    def set_phase_conductor_size(self, size: Size) -> None:
        """Size the phase conductors; hot-and-neutral cables size the neutral too."""
        for conductor in self._phases():
            conductor.set_size(size)
        if self._voltage.has_hot_and_neutral_only and self._neutral is not None:
            self._neutral.set_size(size)

    @property
    def neutral_conductor_size(self) -> Optional[Size]:
        return self._neutral.size if self._neutral is not None else None

    def set_neutral_conductor_size(self, size: Size) -> None:
        neutral = self._require_neutral()
        neutral.set_size(size)
        if self._voltage.has_hot_and_neutral_only:
            self._phase_a.set_size(size)

    @property
    def grounding_conductor_size(self) -> Size:
        return self._ground.size

    def set_grounding_conductor_size(self, size: Size) -> None:
        self._ground.set_size(size)

    @property
    def metal(self) -> Metal:
        return self._phase_a.metal

    def set_metal_for_phase_and_neutral(self, metal: Metal) -> None:
        for conductor in self._phases():
            conductor.set_metal(metal)
        if self._neutral is not None:
            self._neutral.set_metal(metal)

    @property
    def metal_for_grounding(self) -> Metal:
        return self._ground.metal

    def set_metal_for_grounding(self, metal: Metal) -> None:
        self._ground.set_metal(metal)

    @property
    def insulation(self) -> Insulation:
        return self._phase_a.insulation

    def set_insulation(self, insulation: Insulation) -> None:
        for conductor in self._phases():
            conductor.set_insulation(insulation)
        if self._neutral is not None:
            self._neutral.set_insulation(insulation)

    @property
    def temp_rating(self) -> TempRating:
        return self._phase_a.temp_rating

    @property
    def is_neutral_current_carrying(self) -> bool:
        return self._require_neutral().role is Role.NEUCC

    def set_neutral_as_current_carrying(self) -> None:
        self._require_neutral().set_role(Role.NEUCC)

    def set_neutral_as_non_current_carrying(self) -> None:
        self._require_neutral().set_role(Role.NEUNCC)

    # -- cable properties --------------------------------------------------
    @property
    def cable_type(self) -> CableType:
        return self._type

    def set_type(self, cable_type: CableType) -> None:
        self._type = cable_type

    @property
    def outer_material(self) -> OuterMaterial:
        return self._type.outer_material

    @property
    def jacketed(self) -> bool:
        return self._jacketed

    def set_jacketed(self, jacketed: bool = True) -> None:
        self._jacketed = jacketed

    @property
    def outer_diameter(self) -> float:
        return self._outer_diameter

    def set_outer_diameter(self, outer_diameter: float) -> None:
        if outer_diameter <= 0:
            raise ParameterError(f"Outer diameter must be positive, got {outer_diameter}.")
        self._outer_diameter = max(outer_diameter, MINIMUM_OUTER_DIAMETER)

    @property
    def insulated_area_in2(self) -> float:
        return pi * 0.25 * self._outer_diameter * self._outer_diameter

    @property
    def current_carrying_count(self) -> int:
        count = sum(conductor.current_carrying_count for conductor in self._phases())
        if self._neutral is not None:
            count += self._neutral.current_carrying_count
        return count

    @property
    def qualifies_for_bundle_exception(self) -> bool:
        """AC/MC cable, no jacket, three or fewer CCC, copper 12 AWG or smaller: 310.15(B)(3)(a)(4)."""
        return (
            self._type.is_armored
            and not self._jacketed
            and self.current_carrying_count <= 3
            and self.size <= Size.AWG_12
            and self.metal is Metal.COPPER
        )

    def adjustment_factor(self) -> float:
        if self.has_conduit:
            return self._conduit_adjustment()
        if self.has_bundle:
            bundle = self._container
            return cable_bundle_adjustment_factor(
                bundle.complies_with_310_15_b_3_a_4(),  # type: ignore[union-attr]
                bundle.complies_with_310_15_b_3_a_5(),  # type: ignore[union-attr]
                bundle.current_carrying_count,  # type: ignore[union-attr]
                bundle.bundling_length,  # type: ignore[union-attr]
            )
        return adjustment_factor_for_count(self.current_carrying_count)

    @property
    def description(self) -> str:
        text = f"{self._type.value} Cable: ({self.hot_count}) {self._phase_a.description}"
        if self._neutral is not None:
            text += f" + (1) {self._neutral.description}"
        return text + f" + (1) {self._ground.description}"

    def copy(self) -> "Cable":
        clone = Cable(self._voltage, self._type, self._outer_diameter, self._jacketed)
        self._copy_installation_to(clone)
        for mine, theirs in zip(self._phases(), clone._phases()):
            theirs.copy_from(mine)
        if self._neutral is not None and clone._neutral is not None:
            clone._neutral.copy_from(self._neutral)
        clone._ground.copy_from(self._ground)
        return clone

    def __repr__(self) -> str:
        return f"Cable({self.description})"


# name: (voltage, phase size, ground size, outer diameter in inches)
MC_PRESETS: Dict[str, Tuple[VoltageAC, Size, Size, float]] = {
    "MC_12_3": (VoltageAC.V208_1PH_3W, Size.AWG_12, Size.AWG_12, 0.586),
    "MC_12_4": (VoltageAC.V208_3PH_4W, Size.AWG_12, Size.AWG_12, 0.586),
    "MC_10_2": (VoltageAC.V120_1PH_2W, Size.AWG_10, Size.AWG_10, 0.581),
    "MC_10_3": (VoltageAC.V208_1PH_3W, Size.AWG_10, Size.AWG_10, 0.622),
    "MC_10_4": (VoltageAC.V208_3PH_4W, Size.AWG_10, Size.AWG_10, 0.643),
    "MC_8_2": (VoltageAC.V120_1PH_2W, Size.AWG_8, Size.AWG_10, 0.677),
    "MC_8_3": (VoltageAC.V208_1PH_3W, Size.AWG_8, Size.AWG_10, 0.813),
    "MC_8_4": (VoltageAC.V208_3PH_4W, Size.AWG_8, Size.AWG_10, 0.848),
}


def mc_cable(name: str) -> Cable:
    """Return a new copper THHN MC cable built from a commercial preset."""
    try:
        voltage, phase, ground, diameter = MC_PRESETS[name.upper()]
    except KeyError as exc:
        raise ParameterError(f"Unknown MC cable preset '{name}'.") from exc
    cable = Cable(voltage, CableType.MC, diameter)
    cable.set_insulation(Insulation.THHN)
    cable.set_phase_conductor_size(phase)
    if cable.has_neutral:
        cable.set_neutral_conductor_size(phase)
    cable.set_grounding_conductor_size(ground)
    return cable
