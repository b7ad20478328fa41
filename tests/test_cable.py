import pytest

from necsizing.errors import OwnershipError, ParameterError
from necsizing.factors import NECEdition
from necsizing.systems import VoltageAC
from necsizing.tables.conduits import OuterMaterial
from necsizing.tables.sizes import Insulation, Metal, Size
from necsizing.wiring import Bundle, Cable, CableType, Conductor, Conduit, Role, mc_cable


def test_conductors_follow_the_voltage_system():
    single = Cable(VoltageAC.V120_1PH_2W)
    assert single.hot_count == 1
    assert single.has_neutral
    assert single.current_carrying_count == 2

    three_wire = Cable(VoltageAC.V208_3PH_3W)
    assert three_wire.hot_count == 3
    assert three_wire.neutral_conductor is None
    assert three_wire.current_carrying_count == 3
    with pytest.raises(OwnershipError):
        three_wire.set_neutral_conductor_size(Size.AWG_10)

    four_wire = Cable(VoltageAC.V208_3PH_4W)
    assert four_wire.neutral_conductor.role is Role.NEUNCC
    assert four_wire.current_carrying_count == 3
    four_wire.set_neutral_as_current_carrying()
    assert four_wire.current_carrying_count == 4
    assert four_wire.adjustment_factor() == 0.8


def test_hot_and_neutral_cables_size_both_together():
    cable = Cable(VoltageAC.V120_1PH_2W)
    cable.set_phase_conductor_size(Size.AWG_10)
    assert cable.neutral_conductor_size is Size.AWG_10
    cable.set_neutral_conductor_size(Size.AWG_8)
    assert cable.phase_conductor_size is Size.AWG_8

    cable = Cable(VoltageAC.V208_3PH_4W)
    cable.set_phase_conductor_size(Size.AWG_4)
    cable.set_neutral_conductor_size(Size.AWG_2)
    assert cable.phase_conductor_size is Size.AWG_4
    assert cable.neutral_conductor_size is Size.AWG_2


def test_conductor_accessors_return_copies():
    cable = Cable(VoltageAC.V120_1PH_2W)
    phase = cable.phase_conductor
    phase.set_size(Size.AWG_4)
    assert cable.phase_conductor_size is Size.AWG_12
    assert cable.grounding_conductor.role is Role.GND


def test_outer_diameter_and_material():
    cable = Cable(VoltageAC.V120_1PH_2W, CableType.NM, outer_diameter=0.3)
    assert cable.outer_diameter == 0.5
    assert cable.outer_material is OuterMaterial.PVC
    assert Cable(VoltageAC.V120_1PH_2W, CableType.AC).outer_material is OuterMaterial.STEEL
    with pytest.raises(ParameterError):
        cable.set_outer_diameter(0)


def test_copy_keeps_every_conductor():
    cable = Cable(VoltageAC.V208_3PH_4W, CableType.AC, 0.8, True, length=40)
    cable.set_phase_conductor_size(Size.AWG_6)
    cable.set_neutral_conductor_size(Size.AWG_4)
    cable.set_grounding_conductor_size(Size.AWG_10)
    cable.set_metal_for_phase_and_neutral(Metal.ALUMINUM)
    cable.set_insulation(Insulation.THHN)
    clone = cable.copy()
    assert clone.phase_conductor_size is Size.AWG_6
    assert clone.neutral_conductor_size is Size.AWG_4
    assert clone.grounding_conductor_size is Size.AWG_10
    assert clone.metal is Metal.ALUMINUM
    assert clone.insulation is Insulation.THHN
    assert clone.jacketed
    assert clone.outer_diameter == 0.8
    assert clone.length == 40
    assert clone.cable_type is CableType.AC


def test_cable_in_conduit_takes_rooftop_from_the_conduit():
    conduit = Conduit(rooftop_distance=1)
    cable = conduit.add(Cable(VoltageAC.V120_1PH_2W))
    assert cable.rooftop_distance == 1
    with pytest.raises(OwnershipError):
        cable.set_rooftop_distance(2)
    bundled = Bundle().add(Cable(VoltageAC.V120_1PH_2W))
    with pytest.raises(OwnershipError):
        bundled.set_rooftop_distance(2)


def test_free_cable_rooftop_condition():
    cable = Cable(VoltageAC.V120_1PH_2W, edition=NECEdition.NEC2017)
    cable.set_rooftop_distance(0.5)
    assert cable.is_rooftop_condition
    cable.reset_rooftop_condition()
    assert not cable.is_rooftop_condition


def test_mc_cable_presets():
    cable = mc_cable("mc_12_3")
    assert cable.voltage is VoltageAC.V208_1PH_3W
    assert cable.insulation is Insulation.THHN
    assert cable.grounding_conductor_size is Size.AWG_12
    assert cable.outer_diameter == pytest.approx(0.586)
    assert mc_cable("MC_8_2").grounding_conductor_size is Size.AWG_10
    with pytest.raises(ParameterError):
        mc_cable("MC_6_2")


def test_description_lists_every_conductor():
    cable = Cable(VoltageAC.V120_1PH_2W)
    assert cable.description == (
        "MC Cable: (1) #12 AWG THW (CU)(HOT) + (1) #12 AWG THW (CU)(NEUCC) + (1) #12 AWG THW (CU)(GND)"
    )


def _mixed_bundle(length=25):
    bundle = Bundle(bundling_length=length)
    for _ in range(3):
        bundle.add(Conductor())
    cables = [bundle.add(Cable(VoltageAC.V120_1PH_2W, CableType.AC)) for _ in range(3)]
    return bundle, cables


def test_bundle_exception_for_small_armored_cables():
    bundle, cables = _mixed_bundle()
    assert bundle.current_carrying_count == 9
    assert bundle.complies_with_310_15_b_3_a_4()
    assert all(cable.adjustment_factor() == 1.0 for cable in cables)
    assert bundle.conduitables[0].adjustment_factor() == 0.7


@pytest.mark.parametrize(
    "change",
    [
        lambda cable: cable.set_jacketed(True),
        lambda cable: cable.set_type(CableType.NM),
        lambda cable: cable.set_phase_conductor_size(Size.AWG_8),
        lambda cable: cable.set_metal_for_phase_and_neutral(Metal.ALUMINUM),
    ],
)
def test_one_non_qualifying_cable_removes_the_exception(change):
    bundle, cables = _mixed_bundle()
    change(cables[0])
    assert not bundle.complies_with_310_15_b_3_a_4()
    assert all(cable.adjustment_factor() == 0.7 for cable in cables)


def test_large_bundle_of_armored_cables():
    bundle = Bundle(bundling_length=30)
    cables = [bundle.add(Cable(VoltageAC.V120_1PH_2W, CableType.MC)) for _ in range(7)]
    for _ in range(7):
        bundle.add(Conductor())
    assert bundle.current_carrying_count == 21
    assert not bundle.complies_with_310_15_b_3_a_4()
    assert bundle.complies_with_310_15_b_3_a_5()
    assert cables[0].adjustment_factor() == 0.6
    assert bundle.conduitables[-1].adjustment_factor() == 0.45


def test_large_bundle_conductor_limits_apply_since_2017():
    for edition, expected in ((NECEdition.NEC2014, 0.6), (NECEdition.NEC2017, 0.45)):
        bundle = Bundle(bundling_length=30, edition=edition)
        cables = [bundle.add(Cable(VoltageAC.V120_1PH_2W, CableType.MC)) for _ in range(11)]
        cables[0].set_phase_conductor_size(Size.AWG_10)
        assert bundle.current_carrying_count == 22
        assert cables[1].adjustment_factor() == expected


def test_short_bundle_never_uses_the_large_bundle_exception():
    bundle = Bundle(bundling_length=24)
    cables = [bundle.add(Cable(VoltageAC.V120_1PH_2W, CableType.MC, jacketed=True)) for _ in range(11)]
    assert not bundle.complies_with_310_15_b_3_a_5()
    assert cables[0].adjustment_factor() == 1.0


def test_short_bundle_never_uses_the_small_cable_exception():
    bundle, cables = _mixed_bundle(length=10)
    assert bundle.current_carrying_count == 9
    assert not bundle.complies_with_310_15_b_3_a_4()
    assert all(cable.adjustment_factor() == 1.0 for cable in cables)
    assert bundle.conduitables[0].adjustment_factor() == 1.0
