"""Loads fed by a circuit.

The sizing engine only needs the :class:`Load` protocol; :class:`GeneralLoad`
is the general-purpose implementation.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from .errors import ParameterError
from .systems import VoltageAC
from .tables.sizes import Size

MIN_POWER_FACTOR = 0.7
MAX_POWER_FACTOR = 1.0
CONTINUOUS_MULTIPLIER = 1.25


class CircuitType(Enum):
    SERVICE = "SERVICE"
    FEEDER = "FEEDER"
    DEDICATED_BRANCH = "DEDICATED BRANCH"
    MULTI_OUTLET_BRANCH = "MULTI-OUTLET BRANCH"


class LoadType(Enum):
    CONTINUOUS = "CONTINUOUS"
    NONCONTINUOUS = "NONCONTINUOUS"
    MIXED = "MIXED"


@runtime_checkable
class Load(Protocol):
    """What the circuit orchestrator reads from a load."""

    @property
    def voltage(self) -> VoltageAC: ...

    @property
    def nominal_current(self) -> float: ...

    @property
    def neutral_current(self) -> float: ...

    @property
    def mca(self) -> float: ...

    @property
    def power_factor(self) -> float: ...

    @property
    def is_lagging(self) -> bool: ...

    @property
    def is_neutral_current_carrying(self) -> bool: ...

    @property
    def is_non_linear(self) -> bool: ...

    @property
    def required_circuit_type(self) -> CircuitType: ...

    @property
    def max_ocpd_rating(self) -> float: ...

    @property
    def next_higher_rating_rule_applies(self) -> bool: ...

    @property
    def marked_conductor_size(self) -> Optional[Size]: ...

    def copy(self) -> "Load": ...


class GeneralLoad:
    """A general load: 120 V 1Ø 2W, 10 A, unity power factor and non-continuous by default."""

    def __init__(
        self,
        voltage: VoltageAC = VoltageAC.V120_1PH_2W,
        nominal_current: float = 10,
        power_factor: float = 1.0,
        lagging: bool = True,
        description: str = "",
    ) -> None:
        self._voltage = voltage
        self._nominal_current = self._checked_current(nominal_current)
        self._power_factor = self._clamped_pf(power_factor)
        self._lagging = lagging
        self._type = LoadType.NONCONTINUOUS
        self._mca = self._nominal_current
        self._non_linear = False
        self._neutral_current: Optional[float] = None
        self._circuit_type = CircuitType.DEDICATED_BRANCH
        self._max_ocpd_rating = 0.0
        self._nhsr_rule = True
        self._marked_size: Optional[Size] = None
        self.description = description

    @staticmethod
    def _checked_current(current: float) -> float:
        if current <= 0:
            raise ParameterError(f"Nominal current must be positive, got {current}.")
        return float(current)

    @staticmethod
    def _clamped_pf(power_factor: float) -> float:
        return min(MAX_POWER_FACTOR, max(MIN_POWER_FACTOR, float(power_factor)))

    # -- electrical --------------------------------------------------------
    @property
    def voltage(self) -> VoltageAC:
        return self._voltage

    def set_voltage(self, voltage: VoltageAC) -> None:
        self._voltage = voltage

    @property
    def nominal_current(self) -> float:
        return self._nominal_current

    def set_nominal_current(self, current: float) -> None:
        """Change the nominal current, keeping the load type."""
        self._nominal_current = self._checked_current(current)
        if self._type is LoadType.CONTINUOUS:
            self._mca = CONTINUOUS_MULTIPLIER * self._nominal_current
        elif self._type is LoadType.NONCONTINUOUS or self._mca < self._nominal_current:
            self._type = LoadType.NONCONTINUOUS
            self._mca = self._nominal_current

    @property
    def neutral_current(self) -> float:
        if not self._voltage.has_neutral:
            return 0.0
        if self._neutral_current is not None:
            return self._neutral_current
        return self._nominal_current

    def set_neutral_current(self, current: Optional[float]) -> None:
        """Override the neutral current; ``None`` restores the nominal current."""
        if current is not None and current < 0:
            raise ParameterError(f"Neutral current cannot be negative, got {current}.")
        self._neutral_current = current

    @property
    def power_factor(self) -> float:
        return self._power_factor

    def set_power_factor(self, power_factor: float) -> None:
        self._power_factor = self._clamped_pf(power_factor)

    @property
    def is_lagging(self) -> bool:
        return self._lagging

    def set_lagging(self, lagging: bool = True) -> None:
        self._lagging = lagging

    @property
    def volt_amperes(self) -> float:
        return self._voltage.voltage * self._voltage.factor * self._nominal_current

    @property
    def watts(self) -> float:
        return self.volt_amperes * self._power_factor

    # -- continuousness ----------------------------------------------------
    @property
    def load_type(self) -> LoadType:
        return self._type

    @property
    def mca(self) -> float:
        return self._mca

    @property
    def mca_multiplier(self) -> float:
        return self._mca / self._nominal_current

    def set_continuous(self) -> None:
        self._type = LoadType.CONTINUOUS
        self._mca = CONTINUOUS_MULTIPLIER * self._nominal_current

    def set_non_continuous(self) -> None:
        self._type = LoadType.NONCONTINUOUS
        self._mca = self._nominal_current

    def set_mixed(self, mca: float) -> None:
        """Set an explicit MCA, which cannot be below the nominal current."""
        if mca < self._nominal_current:
            raise ParameterError("The MCA of a general load cannot be less than its nominal current.")
        if mca == self._nominal_current:
            self.set_non_continuous()
            return
        self._type = LoadType.MIXED
        self._mca = float(mca)

    # -- neutral -----------------------------------------------------------
    @property
    def is_non_linear(self) -> bool:
        return self._non_linear

    def set_non_linear(self, non_linear: bool = True) -> None:
        self._non_linear = non_linear

    @property
    def is_neutral_current_carrying(self) -> bool:
        """310.15(B)(5): a 3Ø 4W neutral of a linear load is not counted."""
        if self._non_linear:
            return self._voltage.has_neutral
        if self._voltage.has_neutral:
            return self._voltage.wires != 4
        return False

    # -- protection --------------------------------------------------------
    @property
    def required_circuit_type(self) -> CircuitType:
        return self._circuit_type

    def set_circuit_type(self, circuit_type: CircuitType) -> None:
        self._circuit_type = circuit_type

    @property
    def max_ocpd_rating(self) -> float:
        return self._max_ocpd_rating

    def set_max_ocpd_rating(self, rating: float) -> None:
        """A non zero rating is the maximum OCPD the load allows."""
        if rating < 0:
            raise ParameterError(f"OCPD rating cannot be negative, got {rating}.")
        self._max_ocpd_rating = float(rating)

    @property
    def next_higher_rating_rule_applies(self) -> bool:
        return self._nhsr_rule

    def set_next_higher_rating_rule(self, applies: bool) -> None:
        self._nhsr_rule = applies

    @property
    def marked_conductor_size(self) -> Optional[Size]:
        return self._marked_size

    def set_marked_conductor_size(self, size: Optional[Size]) -> None:
        self._marked_size = size

    def copy(self) -> "GeneralLoad":
        clone = GeneralLoad(self._voltage, self._nominal_current, self._power_factor, self._lagging, self.description)
        clone._type = self._type
        clone._mca = self._mca
        clone._non_linear = self._non_linear
        clone._neutral_current = self._neutral_current
        clone._circuit_type = self._circuit_type
        clone._max_ocpd_rating = self._max_ocpd_rating
        clone._nhsr_rule = self._nhsr_rule
        clone._marked_size = self._marked_size
        return clone

    def __repr__(self) -> str:
        return (
            f"GeneralLoad({self._voltage.label}, {self._nominal_current} A, "
            f"{self._type.value}, MCA={self._mca}, PF={self._power_factor})"
        )
