"""Conduits: raceways sized from the conductors and cables they hold (NEC Chapter 9)."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..errors import ParameterError
from ..factors import DEFAULT_EDITION, NECEdition, is_rooftop_condition
from ..messages import ERROR104, ResultMessages
from ..tables.conduits import ConduitType, OuterMaterial, TradeSize, area_in2, trade_size_for_area
from ..tables.conductors import has_insulated_area
from ..tables.sizes import Size
from .conductor import Conductor, Role
from .conduitable import Conduitable
from .container import Container

logger = logging.getLogger(__name__)


def max_fill_percentage(filling_count: int, nipple: bool = False) -> float:
    """Chapter 9 Table 1 and Note 4 fill limits."""
    if nipple:
        return 60.0
    if filling_count <= 1:
        return 53.0
    if filling_count == 2:
        return 31.0
    return 40.0


class Conduit(Container):
    """A raceway holding copies of conductors and cables.

    Ambient temperature, rooftop distance and edition set here are seen by
    every member at once.
    """

    def __init__(
        self,
        ambient_temperature_f: float = 86,
        conduit_type: ConduitType = ConduitType.EMT,
        minimum_trade_size: TradeSize = TradeSize.T1_2,
        nipple: bool = False,
        rooftop_distance: float = -1,
        edition: NECEdition = DEFAULT_EDITION,
    ) -> None:
        super().__init__(ambient_temperature_f, edition)
        self._type = conduit_type
        self._minimum_trade_size = minimum_trade_size
        self._nipple = nipple
        self._rooftop_distance = rooftop_distance
        self.result_messages = ResultMessages()

    def _check_addable(self, conduitable: Conduitable) -> None:
        super()._check_addable(conduitable)
        if isinstance(conduitable, Conductor) and not has_insulated_area(conduitable.size, conduitable.insulation):
            raise ParameterError(
                f"{conduitable.description} has no Chapter 9 Table 5 area and cannot be installed in a conduit."
            )

    # -- properties --------------------------------------------------------
    @property
    def conduit_type(self) -> ConduitType:
        return self._type

    def set_type(self, conduit_type: ConduitType) -> None:
        self._type = conduit_type

    @property
    def material(self) -> OuterMaterial:
        return self._type.material

    @property
    def minimum_trade_size(self) -> TradeSize:
        return self._minimum_trade_size

    def set_minimum_trade_size(self, trade_size: TradeSize) -> None:
        self._minimum_trade_size = trade_size

    @property
    def nipple(self) -> bool:
        return self._nipple

    def set_nipple(self, nipple: bool = True) -> None:
        self._nipple = nipple

    @property
    def rooftop_distance(self) -> float:
        return self._rooftop_distance

    def set_rooftop_distance(self, distance_in: float) -> None:
        """Set the distance above the roof in inches; negative means not on a rooftop."""
        self._rooftop_distance = distance_in

    def reset_rooftop_condition(self) -> None:
        self._rooftop_distance = -1

    @property
    def is_rooftop_condition(self) -> bool:
        return is_rooftop_condition(self._rooftop_distance, self._edition)

    # -- fill --------------------------------------------------------------
    @property
    def filling_conductor_count(self) -> int:
        return len(self._members)

    @property
    def max_allowed_fill_percentage(self) -> float:
        return max_fill_percentage(self.filling_conductor_count, self._nipple)

    @property
    def conduitables_area(self) -> float:
        return sum(member.insulated_area_in2 for member in self._members)

    def _trade_size_for(self, area: float, filling_count: int) -> Optional[TradeSize]:
        required = area * 100 / max_fill_percentage(filling_count, self._nipple)
        trade = trade_size_for_area(required, self._type, self._minimum_trade_size)
        if trade is None:
            self.result_messages.add(ERROR104)
            logger.debug("No %s trade size fits %.4f in2", self._type.label, required)
        else:
            self.result_messages.remove(ERROR104)
        return trade

    @property
    def trade_size(self) -> Optional[TradeSize]:
        """Smallest trade size that holds every member within the allowed fill."""
        return self._trade_size_for(self.conduitables_area, self.filling_conductor_count)

    @property
    def area(self) -> float:
        """Internal area of the selected trade size, 0 when nothing fits."""
        trade = self.trade_size
        return area_in2(self._type, trade) if trade is not None else 0.0

    @property
    def fill_percentage(self) -> float:
        area = self.area
        return self.conduitables_area * 100 / area if area else 0.0

    def _grounding_conductors(self) -> List[Conductor]:
        return [m for m in self._members if isinstance(m, Conductor) and m.role is Role.GND]

    @property
    def biggest_egc(self) -> Optional[Size]:
        sizes = [c.size for c in self._grounding_conductors()]
        sizes += [m.grounding_conductor_size for m in self._members if not isinstance(m, Conductor)]  # type: ignore[attr-defined]
        return max(sizes) if sizes else None

    @property
    def trade_size_for_one_egc(self) -> Optional[TradeSize]:
        """Trade size when all circuits share the single biggest grounding conductor."""
        grounds = self._grounding_conductors()
        others = [m for m in self._members if m not in grounds]
        area = sum(m.insulated_area_in2 for m in others)
        count = len(others)
        if grounds:
            biggest = max(grounds, key=lambda c: c.size)
            area += biggest.insulated_area_in2
            count += 1
        return self._trade_size_for(area, count)

    def __repr__(self) -> str:
        return f"Conduit({self._type.label}, members={len(self._members)})"
