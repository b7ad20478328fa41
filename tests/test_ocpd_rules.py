from necsizing.circuits.ocpd_rules import (
    OCPDContext,
    conductor_protection_rule,
    load_maximum_rule,
    multi_outlet_rule,
    resolve_ocpd_rating,
    rule_240_4_d_3,
    rule_240_4_d_6,
)
from necsizing.loads import CircuitType, GeneralLoad
from necsizing.tables.sizes import Metal, Size

_AMPACITY = {Size.AWG_6: 55, Size.AWG_8: 40, Size.AWG_10: 30, Size.AWG_12: 20}


def _context(size, ampacity, current=10, metal=Metal.COPPER, multi_outlet=False, rating=0):
    load = GeneralLoad(nominal_current=current)
    if multi_outlet:
        load.set_circuit_type(CircuitType.MULTI_OUTLET_BRANCH)
    return OCPDContext(
        load=load,
        size=size,
        metal=metal,
        circuit_ampacity=ampacity,
        full_percent_rated=False,
        ampacity_for=lambda candidate: _AMPACITY.get(candidate, 100),
        rating=rating,
    )


def test_load_maximum_is_standardized_down():
    ctx = _context(Size.AWG_8, 50)
    ctx.load.set_max_ocpd_rating(47)
    assert load_maximum_rule(ctx)
    assert ctx.rating == 45
    assert resolve_ocpd_rating(_context(Size.AWG_8, 50)).rating == 50


def test_conductor_protection_takes_the_bigger_rating():
    ctx = _context(Size.AWG_8, 50, current=30)
    assert not conductor_protection_rule(ctx)
    assert ctx.rating == 50
    ctx = _context(Size.AWG_8, 50, current=58)
    conductor_protection_rule(ctx)
    assert ctx.rating == 60


def test_conductor_protection_uses_the_mca():
    ctx = _context(Size.AWG_6, 65, current=56)
    ctx.load.set_continuous()
    conductor_protection_rule(ctx)
    assert ctx.rating == 70
    ctx.full_percent_rated = True
    conductor_protection_rule(ctx)
    assert ctx.rating == 70
    ctx.circuit_ampacity = 55
    conductor_protection_rule(ctx)
    assert ctx.rating == 60


def test_next_lower_rating_without_the_next_higher_rule():
    ctx = _context(Size.AWG_6, 65, current=20)
    ctx.load.set_next_higher_rating_rule(False)
    assert resolve_ocpd_rating(ctx).rating == 60


def test_small_conductor_limits():
    assert resolve_ocpd_rating(_context(Size.AWG_14, 20)).rating == 15
    assert resolve_ocpd_rating(_context(Size.AWG_12, 20, metal=Metal.ALUMINUM)).rating == 15
    assert resolve_ocpd_rating(_context(Size.AWG_12, 25)).rating == 20
    assert resolve_ocpd_rating(_context(Size.AWG_12, 18)).rating == 20
    assert resolve_ocpd_rating(_context(Size.AWG_10, 30, metal=Metal.ALUMINUM)).rating == 25
    assert resolve_ocpd_rating(_context(Size.AWG_10, 35)).rating == 30


def test_small_conductor_rules_skip_other_sizes():
    ctx = _context(Size.AWG_12, 20, rating=20)
    assert not rule_240_4_d_3(ctx)
    ctx = _context(Size.AWG_10, 30, metal=Metal.ALUMINUM, multi_outlet=True, rating=30)
    assert not rule_240_4_d_6(ctx)
    assert ctx.rating == 30


def test_aluminum_10_awg_multi_outlet_keeps_30():
    ctx = resolve_ocpd_rating(_context(Size.AWG_10, 30, metal=Metal.ALUMINUM, multi_outlet=True))
    assert ctx.rating == 30
    assert not ctx.resized


def test_multi_outlet_rule_ignores_dedicated_circuits():
    ctx = _context(Size.AWG_8, 35, current=20, rating=35)
    assert multi_outlet_rule(ctx)
    assert ctx.rating == 35


def test_multi_outlet_uses_next_lower_rating_when_it_protects():
    ctx = _context(Size.AWG_8, 18, current=15, multi_outlet=True, rating=25)
    assert multi_outlet_rule(ctx)
    assert ctx.rating == 20
    assert not ctx.resized


def test_multi_outlet_raises_rating_and_upsizes():
    ctx = _context(Size.AWG_8, 35, current=20, multi_outlet=True, rating=35)
    assert multi_outlet_rule(ctx)
    assert ctx.rating == 40
    assert ctx.size is Size.AWG_6
    assert ctx.circuit_ampacity == 55
    assert ctx.resized


def test_multi_outlet_upsizes_only_while_ampacity_is_below_the_higher_rating():
    ctx = _context(Size.AWG_6, 42, current=42, multi_outlet=True, rating=45)
    multi_outlet_rule(ctx)
    assert ctx.rating == 50
    assert ctx.size is Size.AWG_4
    assert ctx.resized
    ctx = _context(Size.AWG_6, 52, current=46, multi_outlet=True, rating=45)
    multi_outlet_rule(ctx)
    assert ctx.rating == 50
    assert not ctx.resized


def test_multi_outlet_30_amp_needs_10_awg():
    ctx = _context(Size.AWG_12, 26, current=24, multi_outlet=True, rating=25)
    multi_outlet_rule(ctx)
    assert ctx.rating == 30
    assert ctx.size is Size.AWG_10
    assert ctx.resized
    ctx = _context(Size.AWG_12, 26, current=24, metal=Metal.ALUMINUM, multi_outlet=True, rating=25)
    multi_outlet_rule(ctx)
    assert ctx.size is Size.AWG_8
