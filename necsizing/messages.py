"""Structured result messages accumulated while sizing a circuit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class ResultMessage:
    """A compliance error (negative code) or warning (positive code)."""

    code: int
    message: str

    @property
    def severity(self) -> str:
        return "ERROR" if self.code < 0 else "WARNING"

    @property
    def is_error(self) -> bool:
        return self.code < 0

    def to_dict(self) -> dict:
        return {
            "severity": self.severity,
            "code": self.code,
            "message": self.message,
        }


# Conduit
ERROR104 = ResultMessage(-104, "No conduit trade size can accommodate the conductors at the allowed fill.")

# Circuit
WARN200 = ResultMessage(200, "Insulated conductors are being used in free air. Verify this is intended.")
WARN205 = ResultMessage(205, "Insulated conductors are being used in a bundle. Verify this is intended.")
WARN210 = ResultMessage(210, "Cables are being used in a conduit. Verify this is intended.")
ERROR260 = ResultMessage(
    -260,
    "No conductor size can carry this load under the given conditions. "
    "Increment the number of sets or change the installation conditions.",
)
ERROR270 = ResultMessage(-270, "Paralleled conductors must be 1/0 AWG or larger per NEC-310.10(H)(1).")
ERROR280 = ResultMessage(-280, "Private conduits are only available in private conduit mode.")
ERROR282 = ResultMessage(-282, "Private bundles are only available in private bundle mode.")
ERROR286 = ResultMessage(-286, "Cable options are not available when the circuit uses conductors.")
ERROR290 = ResultMessage(
    -290,
    "The temperature rating of the conductor is not suitable for the ambient temperature.",
)
ERROR295 = ResultMessage(-295, "No conductor size satisfies the maximum allowed voltage drop.")


class ResultMessages:
    """Ordered collection of result messages without duplicates."""

    def __init__(self) -> None:
        self._messages: List[ResultMessage] = []

    def add(self, message: ResultMessage) -> None:
        if message not in self._messages:
            self._messages.append(message)

    def remove(self, message: ResultMessage) -> None:
        if message in self._messages:
            self._messages.remove(message)

    def clear(self) -> None:
        self._messages.clear()

    def contains(self, code: int | ResultMessage) -> bool:
        number = code.code if isinstance(code, ResultMessage) else code
        return any(msg.code == number for msg in self._messages)

    def has_errors(self) -> bool:
        return any(msg.is_error for msg in self._messages)

    def has_warnings(self) -> bool:
        return any(not msg.is_error for msg in self._messages)

    @property
    def errors(self) -> List[ResultMessage]:
        return [msg for msg in self._messages if msg.is_error]

    @property
    def warnings(self) -> List[ResultMessage]:
        return [msg for msg in self._messages if not msg.is_error]

    def to_list(self) -> List[dict]:
        return [msg.to_dict() for msg in self._messages]

    def __iter__(self) -> Iterator[ResultMessage]:
        return iter(list(self._messages))

    def __len__(self) -> int:
        return len(self._messages)
