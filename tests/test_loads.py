import math

import pytest

from necsizing.errors import ParameterError
from necsizing.loads import CircuitType, GeneralLoad, Load, LoadType
from necsizing.systems import VoltageAC
from necsizing.tables.sizes import Size


def test_defaults():
    load = GeneralLoad()
    assert isinstance(load, Load)
    assert load.voltage is VoltageAC.V120_1PH_2W
    assert load.nominal_current == 10
    assert load.mca == 10
    assert load.mca_multiplier == 1
    assert load.load_type is LoadType.NONCONTINUOUS
    assert load.required_circuit_type is CircuitType.DEDICATED_BRANCH
    assert load.next_higher_rating_rule_applies


def test_continuous_load_keeps_its_type_when_current_changes():
    load = GeneralLoad()
    load.set_continuous()
    assert load.mca == pytest.approx(12.5)
    load.set_nominal_current(20)
    assert load.load_type is LoadType.CONTINUOUS
    assert load.mca == pytest.approx(25)


def test_mixed_load():
    load = GeneralLoad(nominal_current=10)
    load.set_mixed(15)
    assert load.load_type is LoadType.MIXED
    assert load.mca_multiplier == pytest.approx(1.5)
    load.set_mixed(10)
    assert load.load_type is LoadType.NONCONTINUOUS
    with pytest.raises(ParameterError):
        load.set_mixed(9)


def test_mixed_load_reverts_when_current_exceeds_mca():
    load = GeneralLoad(nominal_current=10)
    load.set_mixed(15)
    load.set_nominal_current(12)
    assert load.load_type is LoadType.MIXED
    load.set_nominal_current(20)
    assert load.load_type is LoadType.NONCONTINUOUS
    assert load.mca == 20


def test_power_factor_is_clamped():
    assert GeneralLoad(power_factor=0.5).power_factor == 0.7
    assert GeneralLoad(power_factor=1.2).power_factor == 1.0


def test_invalid_current():
    with pytest.raises(ParameterError):
        GeneralLoad(nominal_current=0)
    with pytest.raises(ParameterError):
        GeneralLoad().set_neutral_current(-1)
    with pytest.raises(ParameterError):
        GeneralLoad().set_max_ocpd_rating(-5)


def test_neutral_current():
    assert GeneralLoad(VoltageAC.V208_3PH_3W, 50).neutral_current == 0
    load = GeneralLoad(VoltageAC.V208_3PH_4W, 50)
    assert load.neutral_current == 50
    load.set_neutral_current(80)
    assert load.neutral_current == 80
    load.set_neutral_current(None)
    assert load.neutral_current == 50


def test_non_linear_neutral_current_needs_an_explicit_value():
    load = GeneralLoad(VoltageAC.V208_3PH_4W, 100)
    load.set_non_linear()
    assert load.neutral_current == 100
    load.set_neutral_current(173)
    assert load.neutral_current == 173


def test_neutral_current_carrying():
    assert GeneralLoad(VoltageAC.V120_1PH_2W).is_neutral_current_carrying
    assert GeneralLoad(VoltageAC.V208_1PH_3W).is_neutral_current_carrying
    assert not GeneralLoad(VoltageAC.V208_3PH_3W).is_neutral_current_carrying
    four_wire = GeneralLoad(VoltageAC.V208_3PH_4W)
    assert not four_wire.is_neutral_current_carrying
    four_wire.set_non_linear()
    assert four_wire.is_neutral_current_carrying


def test_power():
    load = GeneralLoad(VoltageAC.V208_3PH_3W, 100, 0.8)
    assert load.volt_amperes == pytest.approx(208 * math.sqrt(3) * 100)
    assert load.watts == pytest.approx(208 * math.sqrt(3) * 100 * 0.8)


def test_copy_is_independent():
    load = GeneralLoad(VoltageAC.V480_3PH_4W, 40, 0.9, False, "Pump")
    load.set_continuous()
    load.set_non_linear()
    load.set_circuit_type(CircuitType.FEEDER)
    load.set_max_ocpd_rating(60)
    load.set_marked_conductor_size(Size.AWG_8)
    clone = load.copy()
    assert clone.mca == pytest.approx(50)
    assert clone.is_non_linear
    assert not clone.is_lagging
    assert clone.required_circuit_type is CircuitType.FEEDER
    assert clone.max_ocpd_rating == 60
    assert clone.marked_conductor_size is Size.AWG_8
    assert clone.description == "Pump"
    clone.set_nominal_current(10)
    assert load.nominal_current == 40
