"""Pydantic models for circuit definition files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .circuits import (
    Circuit,
    FreeAir,
    PrivateBundle,
    PrivateConduit,
    SharedBundle,
    SharedConduit,
    WiringMode,
)
from .config import DEFAULT_CONFIG, conduit_type_of, load_config
from .errors import CircuitDefinitionError, NECSizingError
from .factors import MAX_UNDERATED_LENGTH_IN, NECEdition
from .loads import CircuitType, GeneralLoad
from .systems import VoltageAC
from .tables.conduits import ConduitType, TradeSize
from .tables.sizes import Insulation, Metal, Size, TempRating
from .wiring.bundle import Bundle
from .wiring.cable import CableType
from .wiring.conduit import Conduit


class _BaseModel(BaseModel):
    model_config = {
        "populate_by_name": True,
        "extra": "forbid",
    }


def _parsed(parser, value):  # type: ignore[no-untyped-def]
    """Run an enum parser and surface its ``ValueError`` to pydantic."""
    if value is None:
        return None
    parser(str(value))
    return str(value)


class LoadModel(_BaseModel):
    voltage: str = VoltageAC.V120_1PH_2W.name
    nominal_current_A: float = Field(gt=0)
    power_factor: float = Field(default=1.0, ge=0, le=1)
    lagging: bool = True
    type: Literal["NONCONTINUOUS", "CONTINUOUS", "MIXED"] = "NONCONTINUOUS"
    mca_A: Optional[float] = Field(default=None, gt=0)
    non_linear: bool = False
    neutral_current_A: Optional[float] = Field(default=None, ge=0)
    circuit_type: Literal["SERVICE", "FEEDER", "DEDICATED_BRANCH", "MULTI_OUTLET_BRANCH"] = "DEDICATED_BRANCH"
    max_ocpd_rating_A: float = Field(default=0, ge=0)
    next_higher_rating_rule: bool = True
    marked_conductor_size: Optional[str] = None
    description: str = ""

    @field_validator("voltage")
    @classmethod
    def _check_voltage(cls, value: str) -> str:
        return _parsed(VoltageAC.from_label, value)

    @field_validator("marked_conductor_size")
    @classmethod
    def _check_marked_size(cls, value: Optional[str]) -> Optional[str]:
        return _parsed(Size.from_name, value)

    @model_validator(mode="after")
    def _check_mixed(self) -> "LoadModel":
        if self.type == "MIXED" and self.mca_A is None:
            raise ValueError("A MIXED load requires mca_A.")
        return self

    def to_load(self) -> GeneralLoad:
        load = GeneralLoad(
            VoltageAC.from_label(self.voltage),
            self.nominal_current_A,
            self.power_factor,
            self.lagging,
            self.description,
        )
        if self.type == "CONTINUOUS":
            load.set_continuous()
        elif self.type == "MIXED":
            load.set_mixed(self.mca_A)  # type: ignore[arg-type]
        load.set_non_linear(self.non_linear)
        load.set_neutral_current(self.neutral_current_A)
        load.set_circuit_type(CircuitType[self.circuit_type])
        load.set_max_ocpd_rating(self.max_ocpd_rating_A)
        load.set_next_higher_rating_rule(self.next_higher_rating_rule)
        if self.marked_conductor_size is not None:
            load.set_marked_conductor_size(Size.from_name(self.marked_conductor_size))
        return load


class ConduitModel(_BaseModel):
    id: str
    conduit_type: Optional[str] = None
    minimum_trade_size: str = TradeSize.T1_2.value
    nipple: bool = False
    rooftop_distance_in: float = -1
    ambient_F: Optional[float] = None

    @field_validator("conduit_type")
    @classmethod
    def _check_type(cls, value: Optional[str]) -> Optional[str]:
        return _parsed(ConduitType.from_label, value)

    @field_validator("minimum_trade_size")
    @classmethod
    def _check_trade(cls, value: str) -> str:
        return _parsed(TradeSize.from_label, value)

    def to_conduit(self, config: Dict[str, Any], edition: NECEdition) -> Conduit:
        conduit_type = ConduitType.from_label(self.conduit_type) if self.conduit_type else conduit_type_of(config)
        return Conduit(
            self.ambient_F if self.ambient_F is not None else config["ambient_temperature_f"],
            conduit_type,
            TradeSize.from_label(self.minimum_trade_size),
            self.nipple,
            self.rooftop_distance_in,
            edition,
        )


class BundleModel(_BaseModel):
    id: str
    bundling_length_in: float = Field(default=MAX_UNDERATED_LENGTH_IN, ge=0)
    ambient_F: Optional[float] = None

    def to_bundle(self, config: Dict[str, Any], edition: NECEdition) -> Bundle:
        ambient = self.ambient_F if self.ambient_F is not None else config["ambient_temperature_f"]
        return Bundle(ambient, self.bundling_length_in, edition)


class WiringModel(_BaseModel):
    mode: Literal["private_conduit", "shared_conduit", "private_bundle", "shared_bundle", "free_air"] = (
        "private_conduit"
    )
    conduits: int = Field(default=1, ge=1)
    conduit_type: Optional[str] = None
    minimum_trade_size: str = TradeSize.T1_2.value
    nipple: bool = False
    rooftop_distance_in: float = -1
    bundling_length_in: float = Field(default=MAX_UNDERATED_LENGTH_IN, ge=0)
    shared_id: Optional[str] = None

    @field_validator("conduit_type")
    @classmethod
    def _check_type(cls, value: Optional[str]) -> Optional[str]:
        return _parsed(ConduitType.from_label, value)

    @field_validator("minimum_trade_size")
    @classmethod
    def _check_trade(cls, value: str) -> str:
        return _parsed(TradeSize.from_label, value)

    @model_validator(mode="after")
    def _check_shared(self) -> "WiringModel":
        if self.mode.startswith("shared") and not self.shared_id:
            raise ValueError(f"Wiring mode '{self.mode}' requires shared_id.")
        if not self.mode.startswith("shared") and self.shared_id:
            raise ValueError(f"shared_id is only valid for shared modes, not '{self.mode}'.")
        return self

    def to_mode(
        self,
        config: Dict[str, Any],
        conduits: Dict[str, Conduit],
        bundles: Dict[str, Bundle],
    ) -> WiringMode:
        if self.mode == "private_conduit":
            conduit_type = ConduitType.from_label(self.conduit_type) if self.conduit_type else conduit_type_of(config)
            return PrivateConduit(
                self.conduits,
                conduit_type,
                TradeSize.from_label(self.minimum_trade_size),
                self.nipple,
                self.rooftop_distance_in,
            )
        if self.mode == "private_bundle":
            return PrivateBundle(self.bundling_length_in)
        if self.mode == "free_air":
            return FreeAir()
        if self.mode == "shared_conduit":
            if self.shared_id not in conduits:
                raise CircuitDefinitionError(
                    [{"loc": ("wiring", "shared_id"), "msg": f"Unknown conduit '{self.shared_id}'."}]
                )
            return SharedConduit(conduits[self.shared_id])
        if self.shared_id not in bundles:
            raise CircuitDefinitionError(
                [{"loc": ("wiring", "shared_id"), "msg": f"Unknown bundle '{self.shared_id}'."}]
            )
        return SharedBundle(bundles[self.shared_id])


class CircuitModel(_BaseModel):
    id: str
    description: str = ""
    load: LoadModel
    wiring: WiringModel = Field(default_factory=WiringModel)
    sets: int = Field(default=1, ge=1, le=10)
    using_cable: bool = False
    cable_type: str = CableType.MC.value
    jacketed: bool = False
    outer_diameter_in: Optional[float] = Field(default=None, gt=0)
    using_one_egc: bool = False
    length_ft: Optional[float] = Field(default=None, gt=0)
    insulation: Optional[str] = None
    metal: Optional[str] = None
    termination_temp_rating_C: Optional[Literal[60, 75, 90]] = None
    full_percent_rated: bool = False
    max_voltage_drop_percent: Optional[float] = Field(default=None, gt=0, le=100)
    ambient_F: Optional[float] = None

    @field_validator("cable_type")
    @classmethod
    def _check_cable_type(cls, value: str) -> str:
        return _parsed(CableType, value.upper())

    @field_validator("insulation")
    @classmethod
    def _check_insulation(cls, value: Optional[str]) -> Optional[str]:
        return _parsed(Insulation.from_name, value)

    @field_validator("metal")
    @classmethod
    def _check_metal(cls, value: Optional[str]) -> Optional[str]:
        return _parsed(Metal.from_symbol, value)

    def to_circuit(
        self,
        config: Dict[str, Any],
        conduits: Dict[str, Conduit],
        bundles: Dict[str, Bundle],
    ) -> Circuit:
        settings = dict(config)
        if self.length_ft is not None:
            settings["length_ft"] = self.length_ft
        if self.insulation is not None:
            settings["conductor_insulation"] = self.insulation
        if self.metal is not None:
            settings["conductor_metal"] = self.metal
        if self.max_voltage_drop_percent is not None:
            settings["max_voltage_drop_percent"] = self.max_voltage_drop_percent
        if self.ambient_F is not None:
            settings["ambient_temperature_f"] = self.ambient_F
        circuit = Circuit(
            self.load.to_load(),
            self.wiring.to_mode(config, conduits, bundles),
            sets=self.sets,
            using_cable=self.using_cable,
            using_one_egc=self.using_one_egc,
            settings=settings,
            description=self.description or self.id,
        )
        if self.using_cable:
            circuit.set_cable_type(CableType(self.cable_type.upper()))
            circuit.set_cable_jacketed(self.jacketed)
            if self.outer_diameter_in is not None:
                circuit.set_cable_outer_diameter(self.outer_diameter_in)
        if self.termination_temp_rating_C is not None:
            circuit.set_termination_temp_rating(TempRating(self.termination_temp_rating_C))
        circuit.set_full_percent_rated(self.full_percent_rated)
        return circuit


class CircuitBatchModel(_BaseModel):
    settings: Dict[str, Any] = Field(default_factory=dict)
    conduits: List[ConduitModel] = Field(default_factory=list)
    bundles: List[BundleModel] = Field(default_factory=list)
    circuits: List[CircuitModel]

    @field_validator("settings")
    @classmethod
    def _check_settings(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        unknown = sorted(set(value) - set(DEFAULT_CONFIG))
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(unknown)}.")
        return value

    @model_validator(mode="after")
    def _check_ids(self) -> "CircuitBatchModel":
        for name, items in (("conduit", self.conduits), ("bundle", self.bundles), ("circuit", self.circuits)):
            ids = [item.id for item in items]
            duplicates = sorted({item_id for item_id in ids if ids.count(item_id) > 1})
            if duplicates:
                raise ValueError(f"Duplicate {name} id(s): {', '.join(duplicates)}.")
        return self

    def to_circuits(self) -> List[Circuit]:
        config = load_config(self.settings)
        edition = NECEdition.from_year(config["edition"])
        conduits = {model.id: model.to_conduit(config, edition) for model in self.conduits}
        bundles = {model.id: model.to_bundle(config, edition) for model in self.bundles}
        return [model.to_circuit(config, conduits, bundles) for model in self.circuits]


def load_circuits(data: Dict[str, Any]) -> List[Circuit]:
    """Validate a circuit batch dictionary and build its :class:`Circuit` objects."""
    try:
        model = CircuitBatchModel.model_validate(data)
    except ValidationError as exc:
        raise CircuitDefinitionError(exc.errors()) from exc
    try:
        return model.to_circuits()
    except CircuitDefinitionError:
        raise
    except NECSizingError as exc:
        raise CircuitDefinitionError([{"loc": (), "msg": str(exc)}]) from exc


def load_circuits_file(path: str | Path) -> List[Circuit]:
    """Load and validate a circuit batch from a JSON file."""
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    return load_circuits(data)
