"""Shared behavior of everything that can be placed in a conduit or bundle."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Union

from ..errors import OwnershipError, ParameterError
from ..factors import (
    DEFAULT_EDITION,
    NECEdition,
    adjustment_factor,
    is_rooftop_condition,
    temperature_correction_factor,
    validate_ambient,
)
from ..tables.conductors import standard_ampacity
from ..tables.sizes import Insulation, Metal, Size, TempRating

if TYPE_CHECKING:  # pragma: no cover - import-time helpers for type checkers
    from .bundle import Bundle
    from .conduit import Conduit

    Container = Union[Conduit, Bundle]


class Conduitable:
    """Base class of :class:`Conductor` and :class:`Cable`.

    While attached, ambient temperature and edition are read through the
    container, and the rooftop distance through the conduit. Setting any of
    them on an attached member raises :class:`OwnershipError`.
    """

    def __init__(
        self,
        length: float = 100,
        ambient_temperature_f: float = 86,
        rooftop_distance: float = -1,
        edition: NECEdition = DEFAULT_EDITION,
    ) -> None:
        self._length = self._checked_length(length)
        self._ambient_f = validate_ambient(ambient_temperature_f)
        self._rooftop_distance = rooftop_distance
        self._edition = edition
        self._container: Optional["Container"] = None
        # The caller's object this member was copied from, for stored copies.
        self._origin: Optional[Conduitable] = None
        # The container holding a copy of this object, for the caller's original.
        self._placed_in: Optional["Container"] = None

    # -- subclass contract -------------------------------------------------
    @property
    def size(self) -> Size:
        raise NotImplementedError

    @property
    def metal(self) -> Metal:
        raise NotImplementedError

    @property
    def insulation(self) -> Insulation:
        raise NotImplementedError

    @property
    def current_carrying_count(self) -> int:
        raise NotImplementedError

    @property
    def insulated_area_in2(self) -> float:
        raise NotImplementedError

    def adjustment_factor(self) -> float:
        raise NotImplementedError

    def copy(self) -> "Conduitable":
        raise NotImplementedError

    # -- containment -------------------------------------------------------
    @property
    def container(self) -> Optional["Container"]:
        return self._container

    @property
    def has_conduit(self) -> bool:
        from .conduit import Conduit

        return isinstance(self._container, Conduit)

    @property
    def has_bundle(self) -> bool:
        from .bundle import Bundle

        return isinstance(self._container, Bundle)

    @property
    def is_attached(self) -> bool:
        return self._container is not None

    def _check_detached(self, what: str) -> None:
        if self._container is not None:
            raise OwnershipError(f"Cannot set the {what} of a member of a conduit or bundle; set it on the container.")

    # -- installation conditions -------------------------------------------
    @staticmethod
    def _checked_length(length: float) -> float:
        if length <= 0:
            raise ParameterError(f"Length must be positive, got {length}.")
        return length

    @property
    def length(self) -> float:
        return self._length

    def set_length(self, length: float) -> None:
        self._length = self._checked_length(length)

    @property
    def ambient_temperature_f(self) -> float:
        if self._container is not None:
            return self._container.ambient_temperature_f
        return self._ambient_f

    def set_ambient_temperature_f(self, ambient_f: float) -> None:
        self._check_detached("ambient temperature")
        self._ambient_f = validate_ambient(ambient_f)

    @property
    def rooftop_distance(self) -> float:
        if self.has_conduit:
            return self._container.rooftop_distance  # type: ignore[union-attr]
        return self._rooftop_distance

    def set_rooftop_distance(self, distance_in: float) -> None:
        self._check_detached("rooftop condition")
        self._rooftop_distance = distance_in

    def reset_rooftop_condition(self) -> None:
        self.set_rooftop_distance(-1)

    @property
    def is_rooftop_condition(self) -> bool:
        return is_rooftop_condition(self.rooftop_distance, self.edition)

    @property
    def edition(self) -> NECEdition:
        if self._container is not None:
            return self._container.edition
        return self._edition

    def set_edition(self, edition: NECEdition) -> None:
        self._check_detached("NEC edition")
        self._edition = edition

    # -- derating ----------------------------------------------------------
    @property
    def temp_rating(self) -> TempRating:
        return self.insulation.temp_rating()

    def _correction_factor(self, temp_rating: TempRating) -> float:
        # 310.15(B)(3)(c) exception: XHHW-2 takes no rooftop adder.
        rooftop = -1 if self.insulation is Insulation.XHHW2 else self.rooftop_distance
        return temperature_correction_factor(self.ambient_temperature_f, temp_rating, self.edition, rooftop)

    def correction_factor(self) -> float:
        return self._correction_factor(self.temp_rating)

    def _conduit_adjustment(self) -> float:
        conduit = self._container
        return adjustment_factor(conduit.current_carrying_count, nipple=conduit.nipple)  # type: ignore[union-attr]

    def compound_factor(self, temp_rating: Optional[TempRating] = None) -> float:
        """Correction times adjustment; a known ``temp_rating`` recomputes the correction for it."""
        if temp_rating is None or temp_rating is TempRating.UNKNOWN:
            return self.correction_factor() * self.adjustment_factor()
        return self._correction_factor(temp_rating) * self.adjustment_factor()

    def standard_ampacity(self) -> int:
        return standard_ampacity(self.size, self.metal, self.temp_rating)

    def corrected_and_adjusted_ampacity(self) -> float:
        return self.standard_ampacity() * self.compound_factor()

    def _copy_installation_to(self, other: "Conduitable") -> None:
        """Copy the scalar installation state, reading through any container."""
        other._length = self._length
        other._ambient_f = self.ambient_temperature_f
        other._rooftop_distance = self._rooftop_distance
        other._edition = self.edition
