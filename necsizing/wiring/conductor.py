"""Single insulated conductors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..factors import DEFAULT_EDITION, NECEdition, adjustment_factor
from ..tables.conductors import insulated_area_in2
from ..tables.sizes import Insulation, Metal, Size, TempRating
from .conduitable import Conduitable


class Role(Enum):
    HOT = "HOT"
    NEUCC = "NEUCC"
    NEUNCC = "NEUNCC"
    GND = "GND"
    NCONC = "NCONC"

    @property
    def description(self) -> str:
        return _ROLE_DESCRIPTIONS[self]

    @property
    def is_current_carrying(self) -> bool:
        return self in (Role.HOT, Role.NEUCC)

    @property
    def is_neutral(self) -> bool:
        return self in (Role.NEUCC, Role.NEUNCC, Role.NCONC)


_ROLE_DESCRIPTIONS = {
    Role.HOT: "Hot conductor",
    Role.NEUCC: "Neutral, current-carrying conductor",
    Role.NEUNCC: "Neutral, non current-carrying conductor",
    Role.GND: "Equipment grounding conductor",
    Role.NCONC: "Non current-carrying neutral of a multiwire branch circuit",
}


@dataclass(frozen=True)
class ConductorSnapshot:
    """Immutable view of a conductor after a calculation."""

    size: Size
    metal: Metal
    insulation: Insulation
    role: Role
    length: float
    description: str

    def to_dict(self) -> dict:
        return {
            "size": self.size.value,
            "metal": self.metal.value,
            "insulation": self.insulation.value,
            "role": self.role.value,
            "length_ft": self.length,
            "description": self.description,
        }


class Conductor(Conduitable):
    """An insulated conductor that can be installed in a conduit, bundle or free air."""

    def __init__(
        self,
        size: Size = Size.AWG_12,
        metal: Metal = Metal.COPPER,
        insulation: Insulation = Insulation.THW,
        role: Role = Role.HOT,
        length: float = 100,
        ambient_temperature_f: float = 86,
        rooftop_distance: float = -1,
        edition: NECEdition = DEFAULT_EDITION,
    ) -> None:
        super().__init__(length, ambient_temperature_f, rooftop_distance, edition)
        self._size = size
        self._metal = metal
        self._insulation = insulation
        self._role = role

    @property
    def size(self) -> Size:
        return self._size

    def set_size(self, size: Size) -> None:
        self._size = size

    @property
    def metal(self) -> Metal:
        return self._metal

    def set_metal(self, metal: Metal) -> None:
        self._metal = metal

    @property
    def insulation(self) -> Insulation:
        return self._insulation

    def set_insulation(self, insulation: Insulation) -> None:
        self._insulation = insulation

    @property
    def role(self) -> Role:
        return self._role

    def set_role(self, role: Role) -> None:
        self._role = role

    @property
    def temp_rating(self) -> TempRating:
        return self._insulation.temp_rating()

    @property
    def current_carrying_count(self) -> int:
        return 1 if self._role.is_current_carrying else 0

    @property
    def insulated_area_in2(self) -> float:
        return insulated_area_in2(self._size, self._insulation)

    def adjustment_factor(self) -> float:
        if self.has_conduit:
            return self._conduit_adjustment()
        if self.has_bundle:
            bundle = self._container
            return adjustment_factor(bundle.current_carrying_count, bundle.bundling_length)  # type: ignore[union-attr]
        return 1.0

    @property
    def description(self) -> str:
        return f"#{self._size.value} {self._insulation.value} ({self._metal.value})({self._role.value})"

    def copy(self) -> "Conductor":
        """Return a detached clone carrying every scalar field."""
        clone = Conductor(self._size, self._metal, self._insulation, self._role)
        self._copy_installation_to(clone)
        return clone

    def copy_from(self, other: "Conductor") -> None:
        """Take size, metal, insulation and role from ``other``."""
        self._size = other.size
        self._metal = other.metal
        self._insulation = other.insulation
        self._role = other.role

    def snapshot(self) -> ConductorSnapshot:
        return ConductorSnapshot(
            size=self._size,
            metal=self._metal,
            insulation=self._insulation,
            role=self._role,
            length=self._length,
            description=self.description,
        )

    def __repr__(self) -> str:
        return f"Conductor({self.description})"
