import json
from pathlib import Path

import pytest

from necsizing.circuits import FreeAir, PrivateConduit, SharedBundle, SharedConduit
from necsizing.errors import CircuitDefinitionError
from necsizing.loads import CircuitType, LoadType
from necsizing.schema import load_circuits, load_circuits_file
from necsizing.systems import VoltageAC
from necsizing.tables.conduits import ConduitType
from necsizing.tables.sizes import Insulation, Size, TempRating
from necsizing.wiring import CableType

EXAMPLE = Path(__file__).resolve().parents[1] / "examples" / "circuits.json"


def _batch(**circuit):
    entry = {"id": "C-1", "load": {"nominal_current_A": 10}}
    entry.update(circuit)
    return {"circuits": [entry]}


def test_example_file_loads_and_sizes():
    circuits = load_circuits_file(EXAMPLE)
    assert [circuit.description for circuit in circuits] == [
        "Lighting",
        "Rooftop unit",
        "Receptacles east",
        "Receptacles west",
        "Exhaust fan",
        "Unit heater",
    ]
    results = [circuit.calculate() for circuit in circuits]
    assert all(result.ok for result in results)
    assert results[0].phase.size is Size.AWG_12


def test_shared_ids_resolve_to_one_container():
    circuits = load_circuits_file(EXAMPLE)
    east, west = circuits[2], circuits[3]
    assert isinstance(east.mode, SharedConduit)
    assert east.mode.conduit is west.mode.conduit
    assert len(east.mode.conduit) == 6
    assert isinstance(circuits[5].mode, SharedBundle)
    assert isinstance(circuits[4].mode, FreeAir)


def test_defaults_come_from_settings():
    data = _batch()
    data["settings"] = {"length_ft": 250, "conductor_insulation": "THHN", "conduit_type": "PVC-40"}
    (circuit,) = load_circuits(data)
    assert circuit.length == 250
    assert circuit.insulation is Insulation.THHN
    assert circuit.mode == PrivateConduit(conduit_type=ConduitType.PVC40)
    assert circuit.description == "C-1"


def test_circuit_fields_override_settings():
    data = _batch(
        length_ft=40,
        insulation="XHHW-2",
        metal="AL",
        termination_temp_rating_C=75,
        full_percent_rated=True,
        using_cable=True,
        cable_type="ac",
        jacketed=True,
        sets=2,
    )
    data["settings"] = {"length_ft": 250}
    (circuit,) = load_circuits(data)
    assert circuit.length == 40
    assert circuit.insulation is Insulation.XHHW2
    assert circuit.termination_temp_rating is TempRating.T75
    assert circuit.full_percent_rated
    assert circuit.cable_type is CableType.AC
    assert circuit.number_of_sets == 2


def test_load_fields():
    data = _batch(
        load={
            "voltage": "480v 3Ø 4W",
            "nominal_current_A": 40,
            "type": "CONTINUOUS",
            "non_linear": True,
            "neutral_current_A": 55,
            "circuit_type": "FEEDER",
            "max_ocpd_rating_A": 60,
            "marked_conductor_size": "8",
        }
    )
    (circuit,) = load_circuits(data)
    load = circuit.load
    assert load.voltage is VoltageAC.V480_3PH_4W
    assert load.load_type is LoadType.CONTINUOUS
    assert load.neutral_current == 55
    assert load.required_circuit_type is CircuitType.FEEDER
    assert load.max_ocpd_rating == 60
    assert load.marked_conductor_size is Size.AWG_8


@pytest.mark.parametrize(
    "circuit",
    [
        {"load": {"nominal_current_A": 0}},
        {"load": {"nominal_current_A": 10, "voltage": "110v"}},
        {"load": {"nominal_current_A": 10, "type": "MIXED"}},
        {"load": {"nominal_current_A": 10}, "extra": 1},
        {"load": {"nominal_current_A": 10}, "sets": 11},
        {"load": {"nominal_current_A": 10}, "insulation": "XYZ"},
        {"load": {"nominal_current_A": 10}, "wiring": {"mode": "shared_conduit"}},
        {"load": {"nominal_current_A": 10}, "wiring": {"mode": "free_air", "shared_id": "C1"}},
    ],
)
def test_invalid_definitions(circuit):
    entry = {"id": "C-1"}
    entry.update(circuit)
    with pytest.raises(CircuitDefinitionError) as excinfo:
        load_circuits({"circuits": [entry]})
    assert excinfo.value.errors


def test_unknown_shared_id():
    data = _batch(wiring={"mode": "shared_conduit", "shared_id": "missing"})
    with pytest.raises(CircuitDefinitionError) as excinfo:
        load_circuits(data)
    assert "missing" in excinfo.value.errors[0]["msg"]


def test_shared_conduit_with_parallel_sets_is_rejected():
    data = _batch(wiring={"mode": "shared_conduit", "shared_id": "C1"}, sets=2)
    data["conduits"] = [{"id": "C1"}]
    with pytest.raises(CircuitDefinitionError):
        load_circuits(data)


def test_unknown_settings_and_duplicate_ids():
    data = _batch()
    data["settings"] = {"colour": "red"}
    with pytest.raises(CircuitDefinitionError):
        load_circuits(data)
    data = _batch()
    data["circuits"].append(dict(data["circuits"][0]))
    with pytest.raises(CircuitDefinitionError):
        load_circuits(data)


def test_definitions_round_trip_through_json(tmp_path):
    path = tmp_path / "circuits.json"
    path.write_text(json.dumps(_batch(description="Pump")), encoding="utf-8")
    (circuit,) = load_circuits_file(path)
    assert circuit.description == "Pump"
