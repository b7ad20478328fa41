"""Circuit sizing: phase, neutral and grounding conductors, OCPD rating and conduit.

The :class:`Circuit` owns every size-affecting setting. Its conductors or
cables are rebuilt from those settings on each calculation and the outcome is
returned as an immutable :class:`CircuitResult`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Tuple

from ..config import conduit_type_of, edition_of, insulation_of, load_config, metal_of
from ..errors import OwnershipError, ParameterError
from ..factors import NECEdition, validate_ambient
from ..loads import Load
from ..messages import (
    ERROR104,
    ERROR260,
    ERROR270,
    ERROR280,
    ERROR282,
    ERROR286,
    ERROR290,
    ERROR295,
    WARN200,
    WARN205,
    WARN210,
    ResultMessage,
    ResultMessages,
)
from ..tables.conduits import OuterMaterial, TradeSize
from ..tables.conductors import size_for_current, standard_ampacity
from ..tables.sizes import Insulation, Metal, Size, TempRating, biggest
from ..voltage_drop import minimum_size_for_max_drop
from ..wiring.bundle import Bundle
from ..wiring.cable import MINIMUM_OUTER_DIAMETER, Cable, CableType
from ..wiring.conductor import Conductor, ConductorSnapshot, Role
from ..wiring.conduit import Conduit
from ..wiring.conduitable import Conduitable
from ..wiring.container import Container
from .egc_sizer import size_egc
from .ocpd_rules import OCPDContext, resolve_ocpd_rating
from .wiring_mode import (
    FreeAir,
    PrivateBundle,
    PrivateConduit,
    SharedBundle,
    SharedConduit,
    WiringMode,
    WiringModeKind,
)

logger = logging.getLogger(__name__)

MAX_SETS = 10

# 110.14(C)(1)(a)(3): equipment marked for 14 AWG through 1 AWG uses the 60 °C column.
_SMALL_MARKED_SIZES = (Size.AWG_14, Size.AWG_1)


def possible_conduit_counts(sets: int) -> List[int]:
    """Numbers of private conduits that split ``sets`` evenly."""
    if sets < 1 or sets > MAX_SETS:
        raise ParameterError(f"Number of sets must be between 1 and {MAX_SETS}, got {sets}.")
    return [count for count in range(1, sets + 1) if sets % count == 0]


@dataclass(frozen=True)
class CircuitResult:
    """Outcome of :meth:`Circuit.calculate`.

    Sizes are ``None`` when an error stopped the calculation; ``messages``
    then holds at least one error explaining why.
    """

    phase: Optional[ConductorSnapshot]
    neutral: Optional[ConductorSnapshot]
    ground: Optional[ConductorSnapshot]
    ocpd_rating: int
    circuit_ampacity: float
    size_per_ampacity: Optional[Size]
    size_per_voltage_drop: Optional[Size]
    conduit_trade_size: Optional[TradeSize]
    conduit_count: int
    sets: int
    messages: Tuple[ResultMessage, ...] = ()
    description: str = ""

    @property
    def ok(self) -> bool:
        return not any(msg.is_error for msg in self.messages)

    @property
    def errors(self) -> List[ResultMessage]:
        return [msg for msg in self.messages if msg.is_error]

    @property
    def warnings(self) -> List[ResultMessage]:
        return [msg for msg in self.messages if not msg.is_error]

    def to_dict(self) -> Dict[str, object]:
        return {
            "description": self.description,
            "sets": self.sets,
            "phase": self.phase.to_dict() if self.phase else None,
            "neutral": self.neutral.to_dict() if self.neutral else None,
            "ground": self.ground.to_dict() if self.ground else None,
            "ocpd_rating_A": self.ocpd_rating,
            "circuit_ampacity_A": self.circuit_ampacity,
            "size_per_ampacity": self.size_per_ampacity.value if self.size_per_ampacity else None,
            "size_per_voltage_drop": self.size_per_voltage_drop.value if self.size_per_voltage_drop else None,
            "conduit_trade_size": self.conduit_trade_size.label if self.conduit_trade_size else None,
            "conduit_count": self.conduit_count,
            "ok": self.ok,
            "messages": [msg.to_dict() for msg in self.messages],
        }


class Circuit:
    """A load fed through ``sets`` parallel sets of conductors or cables.

    ``settings`` overrides :data:`necsizing.config.DEFAULT_CONFIG`; the
    ambient temperature and edition arguments take precedence over it. Without
    an explicit ``mode`` the circuit runs in one private conduit of the
    configured ``conduit_type``.
    """

    def __init__(
        self,
        load: Load,
        mode: Optional[WiringMode] = None,
        sets: int = 1,
        using_cable: bool = False,
        using_one_egc: bool = False,
        ambient_temperature_f: Optional[float] = None,
        edition: Optional[NECEdition] = None,
        settings: Optional[Dict[str, object]] = None,
        description: str = "",
    ) -> None:
        config = load_config(settings)
        mode = mode if mode is not None else PrivateConduit(conduit_type=conduit_type_of(config))
        self._check_mode(mode, sets)
        self._load = load
        self._mode: WiringMode = mode
        self._sets = sets
        self._using_cable = using_cable
        self._using_one_egc = using_one_egc
        if ambient_temperature_f is None:
            ambient_temperature_f = float(config["ambient_temperature_f"])  # type: ignore[arg-type]
        self._ambient_f = validate_ambient(ambient_temperature_f)
        self._edition = edition if edition is not None else edition_of(config)
        self._length = self._checked_length(float(config["length_ft"]))  # type: ignore[arg-type]
        self._max_vd = self._checked_vd(float(config["max_voltage_drop_percent"]))  # type: ignore[arg-type]
        self._insulation = insulation_of(config)
        self._metal = metal_of(config)
        self._termination = TempRating.UNKNOWN
        self._full_percent_rated = False
        self._cable_type = CableType.MC
        self._cable_jacketed = False
        self._cable_outer_diameter = MINIMUM_OUTER_DIAMETER
        self.description = description
        self._members: List[Conduitable] = []
        self._container: Optional[Container] = None
        self._messages = ResultMessages()
        self._place_members()

    # -- validation --------------------------------------------------------
    @staticmethod
    def _check_mode(mode: WiringMode, sets: int) -> None:
        if sets < 1 or sets > MAX_SETS:
            raise ParameterError(f"Number of sets must be between 1 and {MAX_SETS}, got {sets}.")
        if isinstance(mode, SharedConduit) and sets > 1:
            raise OwnershipError("A circuit in a shared conduit can only have one set of conductors.")
        if isinstance(mode, PrivateConduit) and sets % mode.conduits:
            raise ParameterError(
                f"{mode.conduits} conduits cannot hold {sets} sets evenly; "
                f"use one of {possible_conduit_counts(sets)}."
            )

    @staticmethod
    def _checked_length(length: float) -> float:
        if length <= 0:
            raise ParameterError(f"Circuit length must be positive, got {length}.")
        return length

    @staticmethod
    def _checked_vd(percent: float) -> float:
        if percent <= 0 or percent > 100:
            raise ParameterError(f"Maximum voltage drop must be in (0, 100], got {percent}.")
        return percent

    # -- settings ----------------------------------------------------------
    @property
    def load(self) -> Load:
        return self._load

    @property
    def mode(self) -> WiringMode:
        return self._mode

    def set_mode(self, mode: WiringMode) -> None:
        self._check_mode(mode, self._sets)
        self._mode = mode
        self._place_members()

    @property
    def number_of_sets(self) -> int:
        return self._sets

    def set_number_of_sets(self, sets: int) -> None:
        self._check_mode(self._mode, sets)
        self._sets = sets
        self._place_members()

    @property
    def conduit_count(self) -> int:
        if isinstance(self._mode, PrivateConduit):
            return self._mode.conduits
        if isinstance(self._mode, SharedConduit):
            return 1
        return 0

    def set_conduit_count(self, conduits: int) -> None:
        """Change the number of private conduits; only valid in private conduit mode."""
        if not isinstance(self._mode, PrivateConduit):
            raise OwnershipError("The number of conduits can only be changed in private conduit mode.")
        self.set_mode(replace(self._mode, conduits=conduits))

    @property
    def using_cable(self) -> bool:
        return self._using_cable

    def set_using_cable(self, using_cable: bool = True) -> None:
        self._using_cable = using_cable
        self._place_members()

    @property
    def using_one_egc(self) -> bool:
        return self._using_one_egc

    def set_using_one_egc(self, using_one_egc: bool = True) -> None:
        self._using_one_egc = using_one_egc
        self._place_members()

    @property
    def length(self) -> float:
        return self._length

    def set_length(self, length: float) -> None:
        self._length = self._checked_length(length)

    @property
    def insulation(self) -> Insulation:
        return self._insulation

    def set_insulation(self, insulation: Insulation) -> None:
        self._insulation = insulation

    @property
    def metal(self) -> Metal:
        return self._metal

    def set_metal(self, metal: Metal) -> None:
        self._metal = metal

    @property
    def ambient_temperature_f(self) -> float:
        """Ambient of the circuit; shared containers use their own."""
        return self._ambient_f

    def set_ambient_temperature_f(self, ambient_f: float) -> None:
        self._ambient_f = validate_ambient(ambient_f)

    @property
    def edition(self) -> NECEdition:
        return self._edition

    def set_edition(self, edition: NECEdition) -> None:
        self._edition = edition

    @property
    def termination_temp_rating(self) -> TempRating:
        return self._termination

    def set_termination_temp_rating(self, temp_rating: TempRating) -> None:
        """Rating of the equipment terminals; ``UNKNOWN`` applies 110.14(C)(1) defaults."""
        self._termination = temp_rating

    @property
    def full_percent_rated(self) -> bool:
        return self._full_percent_rated

    def set_full_percent_rated(self, full: bool = True) -> None:
        self._full_percent_rated = full

    @property
    def max_voltage_drop_percent(self) -> float:
        return self._max_vd

    def set_max_voltage_drop_percent(self, percent: float) -> None:
        self._max_vd = self._checked_vd(percent)

    # -- cable options -----------------------------------------------------
    def _check_cable_options(self) -> None:
        if not self._using_cable:
            raise OwnershipError(ERROR286.message)

    @property
    def cable_type(self) -> CableType:
        return self._cable_type

    def set_cable_type(self, cable_type: CableType) -> None:
        self._check_cable_options()
        self._cable_type = cable_type

    def set_cable_jacketed(self, jacketed: bool = True) -> None:
        self._check_cable_options()
        self._cable_jacketed = jacketed

    def set_cable_outer_diameter(self, outer_diameter: float) -> None:
        self._check_cable_options()
        if outer_diameter <= 0:
            raise ParameterError(f"Outer diameter must be positive, got {outer_diameter}.")
        self._cable_outer_diameter = outer_diameter

    # -- containers --------------------------------------------------------
    @property
    def private_conduit(self) -> Conduit:
        """Conduit holding this circuit's sets after :meth:`calculate`."""
        if not isinstance(self._mode, PrivateConduit):
            raise OwnershipError(ERROR280.message)
        self.calculate()
        return self._container  # type: ignore[return-value]

    @property
    def private_bundle(self) -> Bundle:
        if not isinstance(self._mode, PrivateBundle):
            raise OwnershipError(ERROR282.message)
        self.calculate()
        return self._container  # type: ignore[return-value]

    @property
    def conduitables(self) -> Tuple[Conduitable, ...]:
        self.calculate()
        return tuple(self._members)

    @property
    def current_carrying_count(self) -> int:
        """CCC in this circuit's conduit or bundle, or in its own sets in free air."""
        self.calculate()
        if self._container is not None:
            return self._container.current_carrying_count
        return sum(member.current_carrying_count for member in self._members)

    # -- member construction -----------------------------------------------
    def _neutral_role(self) -> Role:
        return Role.NEUCC if self._load.is_neutral_current_carrying else Role.NEUNCC

    def _new_conductor(self, role: Role) -> Conductor:
        return Conductor(
            metal=self._metal,
            insulation=self._insulation,
            role=role,
            length=self._length,
            ambient_temperature_f=self._ambient_f,
            edition=self._edition,
        )

    def _new_cable(self) -> Cable:
        cable = Cable(
            self._load.voltage,
            self._cable_type,
            self._cable_outer_diameter,
            self._cable_jacketed,
            length=self._length,
            ambient_temperature_f=self._ambient_f,
            edition=self._edition,
        )
        cable.set_metal_for_phase_and_neutral(self._metal)
        cable.set_metal_for_grounding(self._metal)
        cable.set_insulation(self._insulation)
        if cable.has_neutral:
            if self._load.is_neutral_current_carrying:
                cable.set_neutral_as_current_carrying()
            else:
                cable.set_neutral_as_non_current_carrying()
        return cable

    def _new_set(self, with_ground: bool = True) -> List[Conduitable]:
        if self._using_cable:
            return [self._new_cable()]
        voltage = self._load.voltage
        members: List[Conduitable] = [self._new_conductor(Role.HOT) for _ in range(voltage.hot_count)]
        if voltage.has_neutral:
            members.append(self._new_conductor(self._neutral_role()))
        if with_ground:
            members.append(self._new_conductor(Role.GND))
        return members

    def _new_container(self) -> Optional[Container]:
        mode = self._mode
        if isinstance(mode, PrivateConduit):
            return Conduit(
                self._ambient_f,
                mode.conduit_type,
                mode.minimum_trade_size,
                mode.nipple,
                mode.rooftop_distance,
                self._edition,
            )
        if isinstance(mode, SharedConduit):
            return mode.conduit
        if isinstance(mode, PrivateBundle):
            return Bundle(self._ambient_f, mode.bundling_length, self._edition)
        if isinstance(mode, SharedBundle):
            return mode.bundle
        return None

    def _sets_in_container(self) -> int:
        mode = self._mode
        if isinstance(mode, PrivateConduit):
            return self._sets // mode.conduits
        if isinstance(mode, FreeAir):
            return 1
        return self._sets

    def _release_members(self) -> None:
        for member in self._members:
            container = member.container
            if container is not None:
                container.remove(member)
        self._members = []
        self._container = None

    def _place_members(self) -> None:
        self._release_members()
        items: List[Conduitable] = []
        for index in range(self._sets_in_container()):
            items.extend(self._new_set(with_ground=not (self._using_one_egc and index > 0)))
        self._container = self._new_container()
        if self._container is None:
            self._members = items
        else:
            self._members = [self._container.add(item) for item in items]
        logger.debug("Placed %d conduitables for %s", len(self._members), self._mode.kind.value)

    def _representative(self) -> Conduitable:
        return self._members[0]

    def _add_mode_warnings(self) -> None:
        kind = self._mode.kind
        if self._using_cable:
            if kind.uses_conduit:
                self._messages.add(WARN210)
        elif kind is WiringModeKind.FREE_AIR:
            self._messages.add(WARN200)
        elif kind.uses_bundle:
            self._messages.add(WARN205)

    # -- size writers ------------------------------------------------------
    def _set_phase_size(self, size: Size) -> None:
        for member in self._members:
            if isinstance(member, Cable):
                member.set_phase_conductor_size(size)
            elif member.role is Role.HOT:  # type: ignore[attr-defined]
                member.set_size(size)  # type: ignore[attr-defined]

    def _set_neutral_size(self, size: Size) -> None:
        for member in self._members:
            if isinstance(member, Cable):
                if member.has_neutral:
                    member.set_neutral_conductor_size(size)
            elif member.role.is_neutral:  # type: ignore[attr-defined]
                member.set_size(size)  # type: ignore[attr-defined]

    def _set_ground_size(self, size: Size) -> None:
        for member in self._members:
            if isinstance(member, Cable):
                member.set_grounding_conductor_size(size)
            elif member.role is Role.GND:  # type: ignore[attr-defined]
                member.set_size(size)  # type: ignore[attr-defined]

    # -- ampacity ----------------------------------------------------------
    def _current_per_set(self, for_neutral: bool = False) -> float:
        current = self._load.neutral_current if for_neutral else self._load.nominal_current
        return current / self._sets

    def _factor(self, member: Conduitable, temp_rating: Optional[TempRating] = None) -> float:
        """Compound factor, further limited by the load's continuous multiplier unless 100 % rated."""
        if self._full_percent_rated:
            return member.compound_factor(temp_rating)
        mca_multiplier = self._load.mca / self._load.nominal_current
        return min(1 / mca_multiplier, member.compound_factor(temp_rating))

    def _default_termination_rating(self, member: Conduitable, current: float) -> TempRating:
        """110.14(C)(1): 60 °C up to 100 A or for small marked sizes, else 75 °C when the conductor allows."""
        marked = self._load.marked_conductor_size
        if marked is not None and _SMALL_MARKED_SIZES[0] <= marked <= _SMALL_MARKED_SIZES[1]:
            return TempRating.T60
        if current > 100 and member.temp_rating.celsius >= 75:
            return TempRating.T75
        return TempRating.T60

    def _size_with_known_termination(self, member: Conduitable, factor: float, current: float) -> Optional[Size]:
        rating = member.temp_rating
        lookup = current / factor
        size = size_for_current(lookup, member.metal, rating)
        if size is None or self._termination.celsius >= rating.celsius:
            return size
        # 310.15(B): the derated ampacity may use the higher column up to the terminal rating.
        if standard_ampacity(size, member.metal, rating) * factor <= standard_ampacity(
            size, member.metal, self._termination
        ):
            return size
        return size_for_current(lookup, member.metal, self._termination)

    def _size_with_unknown_termination(self, member: Conduitable, current: float) -> Optional[Size]:
        rating = self._default_termination_rating(member, current)
        factor = self._factor(member, rating)
        if factor == 0:
            self._messages.add(ERROR290)
            return None
        return size_for_current(current / factor, member.metal, rating)

    def _size_per_ampacity(self, for_neutral: bool = False) -> Optional[Size]:
        member = self._representative()
        factor = self._factor(member)
        if factor == 0:
            self._messages.add(ERROR290)
            return None
        current = self._current_per_set(for_neutral)
        if self._termination is not TempRating.UNKNOWN:
            size = self._size_with_known_termination(member, factor, current)
        else:
            size = self._size_with_unknown_termination(member, current)
            if size is None and self._messages.contains(ERROR290):
                return None
        if size is None:
            self._messages.add(ERROR260)
            return None
        size = biggest(size, self._load.marked_conductor_size)  # type: ignore[assignment]
        if size < Size.AWG_1_0 and self._sets > 1:
            self._messages.add(ResultMessage(ERROR270.code, f"{ERROR270.message} Actual size is {size.value}."))
            return None
        return size

    def ampacity_for(self, size: Size) -> float:
        """Ampacity of the circuit if its phase conductors were ``size``, all sets included."""
        member = self._representative()
        compound = member.compound_factor()
        if compound == 0:
            return 0.0
        rating = member.temp_rating
        if self._termination is not TempRating.UNKNOWN:
            ampacity = standard_ampacity(size, member.metal, rating) * compound
            if self._termination.celsius < rating.celsius:
                ampacity = min(ampacity, standard_ampacity(size, member.metal, self._termination))
            return ampacity * self._sets
        selected = self._default_termination_rating(member, self._current_per_set())
        return standard_ampacity(size, member.metal, selected) * member.compound_factor(selected) * self._sets

    # -- voltage drop ------------------------------------------------------
    def _voltage_drop_material(self) -> Optional[OuterMaterial]:
        if isinstance(self._container, Conduit):
            return self._container.material
        if self._using_cable:
            return self._cable_type.outer_material
        return None

    def _size_per_voltage_drop(self, for_neutral: bool = False) -> Optional[Size]:
        voltage = self._load.voltage
        current = self._load.neutral_current if for_neutral else self._load.nominal_current
        size = minimum_size_for_max_drop(
            voltage.voltage,
            voltage.phases,
            current,
            self._load.power_factor,
            self._load.is_lagging,
            self._max_vd,
            self._length,
            self._sets,
            self._metal,
            self._voltage_drop_material(),
        )
        if size is None:
            self._messages.add(ERROR295)
        return size

    # -- calculation -------------------------------------------------------
    @property
    def result_messages(self) -> ResultMessages:
        return self._messages

    def calculate(self) -> CircuitResult:
        """Size the circuit from the current settings and load."""
        self._messages = ResultMessages()
        self._place_members()
        self._add_mode_warnings()
        result = self._calculate()
        if not result.ok:
            logger.info("Circuit %r failed: %s", self.description, [msg.code for msg in result.errors])
        return result

    def _failed(self, size_per_ampacity: Optional[Size] = None, size_per_vd: Optional[Size] = None) -> CircuitResult:
        return CircuitResult(
            phase=None,
            neutral=None,
            ground=None,
            ocpd_rating=0,
            circuit_ampacity=0.0,
            size_per_ampacity=size_per_ampacity,
            size_per_voltage_drop=size_per_vd,
            conduit_trade_size=None,
            conduit_count=self.conduit_count,
            sets=self._sets,
            messages=tuple(self._messages),
            description=self.description,
        )

    def _neutral_size(self, phase_size: Size) -> Optional[Size]:
        voltage = self._load.voltage
        if self._load.is_non_linear and voltage.phases == 3:
            by_ampacity = self._size_per_ampacity(for_neutral=True)
            if by_ampacity is None:
                return None
            by_vd = self._size_per_voltage_drop(for_neutral=True)
            if by_vd is None:
                return None
            return biggest(by_ampacity, by_vd)
        return phase_size

    def _calculate(self) -> CircuitResult:
        by_ampacity = self._size_per_ampacity()
        if by_ampacity is None:
            return self._failed()
        by_vd = self._size_per_voltage_drop()
        if by_vd is None:
            return self._failed(by_ampacity)
        phase_size: Size = biggest(by_ampacity, by_vd)  # type: ignore[assignment]
        self._set_phase_size(phase_size)

        ampacity = self.ampacity_for(phase_size)
        if ampacity == 0:
            self._messages.add(ERROR290)
            return self._failed(by_ampacity, by_vd)

        neutral_size: Optional[Size] = None
        neutral_follows_phase = False
        if self._load.voltage.has_neutral:
            neutral_size = self._neutral_size(phase_size)
            if neutral_size is None:
                return self._failed(by_ampacity, by_vd)
            neutral_follows_phase = neutral_size == phase_size and not (
                self._load.is_non_linear and self._load.voltage.phases == 3
            )
            self._set_neutral_size(neutral_size)

        ctx = resolve_ocpd_rating(
            OCPDContext(
                load=self._load,
                size=phase_size,
                metal=self._representative().metal,
                circuit_ampacity=ampacity,
                full_percent_rated=self._full_percent_rated,
                ampacity_for=self.ampacity_for,
            )
        )
        if ctx.resized:
            phase_size = ctx.size
            ampacity = ctx.circuit_ampacity
            self._set_phase_size(phase_size)
            if neutral_follows_phase:
                neutral_size = phase_size
                self._set_neutral_size(phase_size)

        egc = size_egc(ctx.rating, self._metal, by_ampacity, by_vd)
        self._set_ground_size(egc)

        trade_size = self._conduit_trade_size()
        return CircuitResult(
            phase=self._snapshot(Role.HOT),
            neutral=self._snapshot(None) if neutral_size is not None else None,
            ground=self._snapshot(Role.GND),
            ocpd_rating=ctx.rating,
            circuit_ampacity=ampacity,
            size_per_ampacity=by_ampacity,
            size_per_voltage_drop=by_vd,
            conduit_trade_size=trade_size,
            conduit_count=self.conduit_count,
            sets=self._sets,
            messages=tuple(self._messages),
            description=self.description,
        )

    def _conduit_trade_size(self) -> Optional[TradeSize]:
        conduit = self._container
        if not isinstance(conduit, Conduit):
            return None
        trade = conduit.trade_size_for_one_egc if self._using_one_egc else conduit.trade_size
        if trade is None:
            self._messages.add(ERROR104)
        return trade

    def _snapshot(self, role: Optional[Role]) -> Optional[ConductorSnapshot]:
        """Snapshot of the first conductor with ``role``; ``None`` selects the neutral."""
        for member in self._members:
            if isinstance(member, Cable):
                if role is Role.HOT:
                    conductor = member.phase_conductor
                elif role is Role.GND:
                    conductor = member.grounding_conductor
                else:
                    conductor = member.neutral_conductor
                if conductor is None:
                    return None
                return replace(conductor.snapshot(), length=member.length)
            conductor = member  # type: ignore[assignment]
            if role is None and conductor.role.is_neutral or conductor.role is role:
                return conductor.snapshot()
        return None

    def __repr__(self) -> str:
        return f"Circuit({self._load!r}, {self._mode.kind.value}, sets={self._sets})"
