"""Exclusive membership shared by conduits and bundles."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, TypeVar

from ..errors import ParameterError
from ..factors import DEFAULT_EDITION, NECEdition, validate_ambient
from .conduitable import Conduitable

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=Conduitable)


class Container:
    """Holds private copies of conductors and cables.

    ``add`` stores a copy and returns it. An item already held by another
    container is released from it first, so no item ever appears in two
    containers. The caller's original never belongs to a container, but
    ``contains`` recognizes it as the source of the held copy.
    """

    def __init__(self, ambient_temperature_f: float = 86, edition: NECEdition = DEFAULT_EDITION) -> None:
        self._ambient_f = validate_ambient(ambient_temperature_f)
        self._edition = edition
        self._members: List[Conduitable] = []

    # -- membership --------------------------------------------------------
    def _check_addable(self, conduitable: Conduitable) -> None:
        if not isinstance(conduitable, Conduitable):
            raise ParameterError(f"Only conductors and cables can be added, got {type(conduitable).__name__}.")

    def _find(self, conduitable: Conduitable) -> Optional[Conduitable]:
        for member in self._members:
            if member is conduitable or member._origin is conduitable:
                return member
        return None

    def _release(self, conduitable: Conduitable) -> Optional[Conduitable]:
        member = self._find(conduitable)
        if member is None:
            return None
        self._members.remove(member)
        # a released member keeps the conditions it saw while attached
        member._ambient_f = member.ambient_temperature_f
        member._rooftop_distance = member.rooftop_distance
        member._edition = member.edition
        member._container = None
        origin = member._origin
        if origin is not None and origin._placed_in is self:
            origin._placed_in = None
        member._origin = None
        logger.debug("Released %r from %r", member, self)
        return member

    def add(self, conduitable: C) -> C:
        """Store a copy of ``conduitable`` and return the stored copy."""
        self._check_addable(conduitable)
        former = conduitable._container
        if former is None:
            former = conduitable._placed_in
        if former is self:
            return self._find(conduitable)  # type: ignore[return-value]
        if former is not None:
            former._release(conduitable)
        member = conduitable.copy()
        member._container = self
        member._origin = conduitable
        conduitable._placed_in = self
        self._members.append(member)
        logger.debug("Added %r to %r", member, self)
        return member  # type: ignore[return-value]

    def remove(self, conduitable: Conduitable) -> None:
        """Detach a held item (or the copy made from ``conduitable``)."""
        self._release(conduitable)

    def contains(self, conduitable: Conduitable) -> bool:
        return self._find(conduitable) is not None

    def __contains__(self, conduitable: object) -> bool:
        return isinstance(conduitable, Conduitable) and self.contains(conduitable)

    def __len__(self) -> int:
        return len(self._members)

    @property
    def conduitables(self) -> Tuple[Conduitable, ...]:
        return tuple(self._members)

    @property
    def is_empty(self) -> bool:
        return not self._members

    @property
    def current_carrying_count(self) -> int:
        return sum(member.current_carrying_count for member in self._members)

    # -- propagated conditions ---------------------------------------------
    @property
    def ambient_temperature_f(self) -> float:
        return self._ambient_f

    def set_ambient_temperature_f(self, ambient_f: float) -> None:
        """Validate and set the ambient temperature seen by every member."""
        self._ambient_f = validate_ambient(ambient_f)

    @property
    def edition(self) -> NECEdition:
        return self._edition

    def set_edition(self, edition: NECEdition) -> None:
        self._edition = edition
