from __future__ import annotations

from enum import Enum
from typing import List

from ..errors import InvalidBloodGroup


class BloodGroup(str, Enum):
    A_POSITIVE = "A+"
    A_NEGATIVE = "A-"
    B_POSITIVE = "B+"
    B_NEGATIVE = "B-"
    AB_POSITIVE = "AB+"
    AB_NEGATIVE = "AB-"
    O_POSITIVE = "O+"
    O_NEGATIVE = "O-"

    @classmethod
    def parse(cls, value: "BloodGroup | str") -> "BloodGroup":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidBloodGroup(value) from exc

    def __str__(self) -> str:
        return self.value


class UrgencyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


BLOOD_GROUPS: List[BloodGroup] = list(BloodGroup)
