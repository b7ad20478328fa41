import pytest

from necsizing.errors import OwnershipError, ParameterError
from necsizing.factors import NECEdition
from necsizing.tables.sizes import Insulation, Metal, Size
from necsizing.wiring import Bundle, Conductor, Conduit, Role


def test_description_and_defaults():
    conductor = Conductor()
    assert conductor.description == "#12 AWG THW (CU)(HOT)"
    assert conductor.current_carrying_count == 1
    assert conductor.adjustment_factor() == 1.0
    assert conductor.standard_ampacity() == 25


def test_roles_and_current_carrying_count():
    assert Conductor(role=Role.NEUCC).current_carrying_count == 1
    assert Conductor(role=Role.NEUNCC).current_carrying_count == 0
    assert Conductor(role=Role.GND).current_carrying_count == 0
    assert Role.NCONC.is_neutral


def test_copy_is_independent():
    original = Conductor(
        Size.AWG_10,
        Metal.ALUMINUM,
        Insulation.THHN,
        Role.NEUCC,
        length=55,
        ambient_temperature_f=95,
        rooftop_distance=2,
        edition=NECEdition.NEC2017,
    )
    clone = original.copy()
    assert clone.size is Size.AWG_10
    assert clone.metal is Metal.ALUMINUM
    assert clone.insulation is Insulation.THHN
    assert clone.role is Role.NEUCC
    assert clone.length == 55
    assert clone.ambient_temperature_f == 95
    assert clone.rooftop_distance == 2
    assert clone.edition is NECEdition.NEC2017
    clone.set_size(Size.AWG_4)
    assert original.size is Size.AWG_10


def test_derated_ampacity_in_conduit():
    conduit = Conduit(ambient_temperature_f=100)
    for _ in range(4):
        conduit.add(Conductor(Size.AWG_12, Metal.COPPER, Insulation.THHN))
    member = conduit.conduitables[0]
    assert member.correction_factor() == pytest.approx(0.91)
    assert member.adjustment_factor() == 0.8
    assert member.corrected_and_adjusted_ampacity() == pytest.approx(30 * 0.91 * 0.8)


def test_grounding_conductor_is_not_counted():
    conduit = Conduit()
    for role in (Role.HOT, Role.HOT, Role.HOT, Role.GND, Role.NEUNCC):
        conduit.add(Conductor(role=role))
    assert conduit.current_carrying_count == 3
    assert conduit.conduitables[0].adjustment_factor() == 1.0


def test_members_read_conditions_from_their_container():
    conduit = Conduit(ambient_temperature_f=86, edition=NECEdition.NEC2017)
    member = conduit.add(Conductor(ambient_temperature_f=50))
    assert member.ambient_temperature_f == 86
    assert member.edition is NECEdition.NEC2017
    conduit.set_ambient_temperature_f(104)
    assert member.ambient_temperature_f == 104


def test_attached_members_reject_condition_setters():
    conduit = Conduit()
    member = conduit.add(Conductor())
    with pytest.raises(OwnershipError):
        member.set_ambient_temperature_f(100)
    with pytest.raises(OwnershipError):
        member.set_rooftop_distance(1)
    with pytest.raises(OwnershipError):
        member.reset_rooftop_condition()
    with pytest.raises(OwnershipError):
        member.set_edition(NECEdition.NEC2020)
    member.set_size(Size.AWG_10)
    assert member.size is Size.AWG_10


def test_detached_member_keeps_last_conditions():
    conduit = Conduit(ambient_temperature_f=104)
    original = Conductor()
    member = conduit.add(original)
    conduit.remove(original)
    assert not member.is_attached
    assert member.ambient_temperature_f == 104
    member.set_ambient_temperature_f(95)
    assert member.ambient_temperature_f == 95


def test_rooftop_condition_comes_from_the_conduit():
    conduit = Conduit(rooftop_distance=0.5)
    member = conduit.add(Conductor(insulation=Insulation.THHN))
    assert member.rooftop_distance == 0.5
    assert member.is_rooftop_condition
    assert member.correction_factor() == pytest.approx(0.65)


def test_xhhw2_takes_no_rooftop_adder():
    conduit = Conduit(rooftop_distance=0.5)
    member = conduit.add(Conductor(insulation=Insulation.XHHW2))
    assert member.correction_factor() == 1.0


def test_bundled_conductor_adjustment_depends_on_length():
    bundle = Bundle(bundling_length=30)
    for _ in range(9):
        bundle.add(Conductor())
    assert bundle.conduitables[0].adjustment_factor() == 0.7
    bundle.set_bundling_length(24)
    assert bundle.conduitables[0].adjustment_factor() == 1.0


def test_invalid_parameters():
    with pytest.raises(ParameterError):
        Conductor(length=0)
    with pytest.raises(ParameterError):
        Conductor(ambient_temperature_f=200)
