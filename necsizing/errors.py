"""Exception types raised by the sizing engine.

Compliance problems found while sizing a circuit are not exceptions; they are
collected as :class:`necsizing.messages.ResultMessage` records instead.
"""

from __future__ import annotations


class NECSizingError(ValueError):
    """Base class for errors raised synchronously by the engine."""


class ParameterError(NECSizingError):
    """Raised when a constructor or setter argument is out of range."""


class OwnershipError(NECSizingError):
    """Raised when an attached member is mutated directly or definitions conflict."""


class TableLookupError(NECSizingError):
    """Raised when a lookup against the embedded NEC tables fails."""


class CircuitDefinitionError(NECSizingError):
    """Raised when a circuit definition payload cannot be validated."""

    def __init__(self, errors):  # type: ignore[no-untyped-def]
        super().__init__("Invalid circuit definition")
        self.errors = errors
