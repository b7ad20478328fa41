import pytest

from necsizing.errors import ParameterError
from necsizing.systems import VoltageAC
from necsizing.tables.conduits import ConduitType, OuterMaterial, TradeSize
from necsizing.tables.sizes import Insulation, Size
from necsizing.wiring import Bundle, Cable, Conductor, Conduit, Role
from necsizing.wiring.conduit import max_fill_percentage


def test_max_fill_percentages():
    assert max_fill_percentage(1) == 53
    assert max_fill_percentage(2) == 31
    assert max_fill_percentage(3) == 40
    assert max_fill_percentage(12) == 40
    assert max_fill_percentage(2, nipple=True) == 60


def test_add_stores_a_copy():
    conduit = Conduit()
    original = Conductor()
    stored = conduit.add(original)
    assert stored is not original
    assert conduit.contains(original)
    assert conduit.contains(stored)
    assert original in conduit
    original.set_size(Size.AWG_4)
    assert stored.size is Size.AWG_12


def test_adding_twice_keeps_one_copy():
    conduit = Conduit()
    original = Conductor()
    first = conduit.add(original)
    second = conduit.add(original)
    assert second is first
    assert len(conduit) == 1


def test_membership_is_exclusive():
    first = Conduit()
    second = Conduit()
    original = Conductor()
    first.add(original)
    second.add(original)
    assert not first.contains(original)
    assert second.contains(original)
    assert len(first) == 0
    assert len(second) == 1


def test_moving_a_stored_member():
    first = Conduit()
    bundle = Bundle()
    stored = first.add(Conductor())
    moved = bundle.add(stored)
    assert first.is_empty
    assert bundle.contains(stored)
    assert moved.container is bundle
    assert stored.container is None


def test_remove_by_original():
    conduit = Conduit()
    original = Conductor()
    conduit.add(original)
    conduit.remove(original)
    assert conduit.is_empty
    # removing something never added is a no-op
    conduit.remove(Conductor())
    assert conduit.is_empty


def test_conductor_without_table_5_area_is_rejected():
    conduit = Conduit()
    with pytest.raises(ParameterError):
        conduit.add(Conductor(Size.KCMIL_1250, insulation=Insulation.THHN))
    with pytest.raises(ParameterError):
        conduit.add("not a conductor")


def test_trade_size_for_a_three_phase_set():
    conduit = Conduit()
    for _ in range(3):
        conduit.add(Conductor(Size.AWG_1))
    conduit.add(Conductor(Size.AWG_6, role=Role.GND))
    assert conduit.conduitables_area == pytest.approx(3 * 0.1901 + 0.0726)
    assert conduit.trade_size is TradeSize.T1_1_2
    assert conduit.area == pytest.approx(2.036)
    assert conduit.fill_percentage == pytest.approx((3 * 0.1901 + 0.0726) / 2.036 * 100)
    assert conduit.max_allowed_fill_percentage == 40
    assert conduit.material is OuterMaterial.STEEL


def test_minimum_trade_size_is_respected():
    conduit = Conduit(minimum_trade_size=TradeSize.T1)
    conduit.add(Conductor())
    assert conduit.trade_size is TradeSize.T1


def test_no_trade_size_fits():
    conduit = Conduit()
    for _ in range(40):
        conduit.add(Conductor(Size.KCMIL_500))
    assert conduit.trade_size is None
    assert conduit.area == 0
    assert conduit.fill_percentage == 0
    assert conduit.result_messages.contains(-104)


def test_trade_size_with_one_shared_egc():
    conduit = Conduit()
    for _ in range(6):
        conduit.add(Conductor(Size.AWG_1))
    conduit.add(Conductor(Size.AWG_1, role=Role.GND))
    conduit.add(Conductor(Size.AWG_4, role=Role.GND))
    assert conduit.biggest_egc is Size.AWG_1
    assert conduit.trade_size is TradeSize.T2_1_2
    assert conduit.trade_size_for_one_egc is TradeSize.T2


def test_cables_count_by_outer_diameter():
    conduit = Conduit(conduit_type=ConduitType.PVC40)
    cable = conduit.add(Cable(VoltageAC.V120_1PH_2W, outer_diameter=0.6))
    assert cable.insulated_area_in2 == pytest.approx(3.141592653589793 * 0.25 * 0.36)
    assert conduit.current_carrying_count == 2
    assert conduit.biggest_egc is Size.AWG_12


def test_nipple_disables_count_adjustment():
    conduit = Conduit(nipple=True)
    for _ in range(10):
        conduit.add(Conductor())
    assert conduit.conduitables[0].adjustment_factor() == 1.0
    assert conduit.max_allowed_fill_percentage == 60
