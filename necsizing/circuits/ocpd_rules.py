"""Rating of the overcurrent protective device of a circuit (NEC 240.4, 210.3, 210.20, 215.3).

The resolver is an ordered list of rules. Each rule reads and updates an
:class:`OCPDContext` and returns ``True`` when the rating is settled, which
stops the chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from ..loads import CircuitType, Load
from ..tables.ocpd import next_lower_rating, rating_above, rating_below, rating_for
from ..tables.sizes import Metal, Size

logger = logging.getLogger(__name__)

MULTI_OUTLET_DISALLOWED = (25, 35, 45)


@dataclass
class OCPDContext:
    """Mutable state threaded through the rules.

    ``ampacity_for`` returns the circuit ampacity for a candidate phase size;
    the multi-outlet rule uses it after upsizing the conductors.
    """

    load: Load
    size: Size
    metal: Metal
    circuit_ampacity: float
    full_percent_rated: bool
    ampacity_for: Callable[[Size], float]
    rating: int = 0
    resized: bool = False

    @property
    def governing_current(self) -> float:
        return self.load.nominal_current if self.full_percent_rated else self.load.mca


Rule = Callable[[OCPDContext], bool]


def load_maximum_rule(ctx: OCPDContext) -> bool:
    """A load that specifies a maximum OCPD gets that rating, standardized down."""
    maximum = ctx.load.max_ocpd_rating
    if not maximum:
        return False
    ctx.rating = next_lower_rating(maximum)
    return True


def conductor_protection_rule(ctx: OCPDContext) -> bool:
    """240.4 for the conductors and 210.20/215.3 for the load; the bigger wins."""
    nhr = ctx.load.next_higher_rating_rule_applies
    ctx.rating = max(rating_for(ctx.circuit_ampacity, nhr), rating_for(ctx.governing_current, nhr))
    return False


def rule_240_4_d_3(ctx: OCPDContext) -> bool:
    if ctx.size is not Size.AWG_14:
        return False
    ctx.rating = 15
    return True


def rule_240_4_d_4(ctx: OCPDContext) -> bool:
    if ctx.size is not Size.AWG_12 or ctx.metal is not Metal.ALUMINUM:
        return False
    ctx.rating = 15
    return True


def rule_240_4_d_5(ctx: OCPDContext) -> bool:
    if ctx.size is not Size.AWG_12 or ctx.metal is Metal.ALUMINUM:
        return False
    ctx.rating = min(ctx.rating, 20)
    return True


def rule_240_4_d_6(ctx: OCPDContext) -> bool:
    if ctx.size is not Size.AWG_10 or ctx.metal is not Metal.ALUMINUM:
        return False
    if ctx.load.required_circuit_type is CircuitType.MULTI_OUTLET_BRANCH:
        return False
    ctx.rating = min(ctx.rating, 25)
    return True


def rule_240_4_d_7(ctx: OCPDContext) -> bool:
    if ctx.size is not Size.AWG_10 or ctx.metal is Metal.ALUMINUM:
        return False
    ctx.rating = min(ctx.rating, 30)
    return True


def multi_outlet_rule(ctx: OCPDContext) -> bool:
    """210.3: multi-outlet branch circuits cannot be rated 25, 35 or 45 A.

    The next lower rating is used when it still protects the conductors and
    serves the load. Otherwise the next higher rating is used and the phase
    conductors are upsized until they are protected by it.
    """
    if ctx.load.required_circuit_type is not CircuitType.MULTI_OUTLET_BRANCH:
        return True
    if ctx.rating not in MULTI_OUTLET_DISALLOWED:
        return True
    lower = rating_below(ctx.rating)
    if lower is not None and lower >= ctx.circuit_ampacity and lower >= ctx.governing_current:
        ctx.rating = lower
        return True
    higher = rating_above(ctx.rating)
    assert higher is not None
    size = None
    if higher == 30:
        if ctx.size < Size.AWG_10:
            # 240.4(D)(6) and (D)(7)
            size = Size.AWG_8 if ctx.metal is Metal.ALUMINUM else Size.AWG_10
    elif ctx.circuit_ampacity <= higher:
        size = ctx.size.next_size_up()
        if size is not None and ctx.ampacity_for(size) <= higher:
            size = size.next_size_up()
    ctx.rating = higher
    if size is not None:
        logger.debug("Multi-outlet rating %s A raised the phase size to %s", higher, size.value)
        ctx.size = size
        ctx.circuit_ampacity = ctx.ampacity_for(size)
        ctx.resized = True
    return True


SMALL_CONDUCTOR_RULES: List[Rule] = [
    rule_240_4_d_3,
    rule_240_4_d_4,
    rule_240_4_d_5,
    rule_240_4_d_6,
    rule_240_4_d_7,
]

RULES: List[Rule] = [
    load_maximum_rule,
    conductor_protection_rule,
    *SMALL_CONDUCTOR_RULES,
    multi_outlet_rule,
]


def resolve_ocpd_rating(ctx: OCPDContext, rules: List[Rule] = RULES) -> OCPDContext:
    """Run ``rules`` in order until one settles the rating."""
    for rule in rules:
        if rule(ctx):
            logger.debug("OCPD rating %s A settled by %s", ctx.rating, rule.__name__)
            break
    return ctx
