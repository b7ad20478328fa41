"""Bundles: conductors and cables grouped together outside a raceway."""

from __future__ import annotations

from ..errors import ParameterError
from ..factors import (
    CABLE_BUNDLE_EXCEPTION_CCC,
    DEFAULT_EDITION,
    MAX_UNDERATED_LENGTH_IN,
    NECEdition,
)
from ..tables.sizes import Metal, Size
from .cable import Cable
from .conductor import Conductor
from .container import Container


class Bundle(Container):
    """Conductors and cables bundled over ``bundling_length`` inches.

    A bundle no longer than 24 in behaves as free air for count adjustment.
    """

    def __init__(
        self,
        ambient_temperature_f: float = 86,
        bundling_length: float = MAX_UNDERATED_LENGTH_IN,
        edition: NECEdition = DEFAULT_EDITION,
    ) -> None:
        super().__init__(ambient_temperature_f, edition)
        self._bundling_length = self._checked_length(bundling_length)

    @staticmethod
    def _checked_length(length: float) -> float:
        if length < 0:
            raise ParameterError(f"Bundling length cannot be negative, got {length}.")
        return length

    @property
    def bundling_length(self) -> float:
        return self._bundling_length

    def set_bundling_length(self, length: float) -> None:
        self._bundling_length = self._checked_length(length)

    def _cables(self):
        return [m for m in self._members if isinstance(m, Cable)]

    def complies_with_310_15_b_3_a_4(self) -> bool:
        """At most 20 CCC bundled over 24 in, of small copper conductors only.

        Cables must be non-jacketed AC/MC with up to three copper CCC of 12 AWG
        or smaller; single conductors must be copper 12 AWG or smaller.
        """
        if self._bundling_length <= MAX_UNDERATED_LENGTH_IN:
            return False
        if self.current_carrying_count > CABLE_BUNDLE_EXCEPTION_CCC:
            return False
        for member in self._members:
            if isinstance(member, Cable):
                if not member.qualifies_for_bundle_exception:
                    return False
            elif isinstance(member, Conductor):
                if member.size > Size.AWG_12 or member.metal is not Metal.COPPER:
                    return False
        return True

    def complies_with_310_15_b_3_a_5(self) -> bool:
        """More than 20 CCC bundled over 24 in, all cables non-jacketed AC/MC.

        From NEC 2017 on, each cable must also meet the conductor limits of (a)(4).
        """
        if self._bundling_length <= MAX_UNDERATED_LENGTH_IN:
            return False
        if self.current_carrying_count <= CABLE_BUNDLE_EXCEPTION_CCC:
            return False
        for cable in self._cables():
            if not cable.cable_type.is_armored or cable.jacketed:
                return False
            if self._edition is not NECEdition.NEC2014 and not cable.qualifies_for_bundle_exception:
                return False
        return True

    def __repr__(self) -> str:
        return f"Bundle(length={self._bundling_length}, members={len(self._members)})"
