from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class UnitRole(Enum):
    """Which slots a phonetic unit may occupy."""

    INITIAL_ONLY = auto()
    MEDIAL_ONLY = auto()
    FINAL_CAPABLE = auto()


class ControlTag(Enum):
    RESET = auto()
    SUPPRESS_AUTO_INITIAL = auto()


class SlotRole(Enum):
    INITIAL = "initial"
    MEDIAL = "medial"
    FINAL = "final"


class SlotState(Enum):
    EMPTY = auto()
    FILLED = auto()
    # Donated final during resyllabification; never survives a transition.
    PENDING_CLEAR = auto()


@dataclass(frozen=True)
class PhoneticUnit:
    jamo: str
    role: UnitRole

    @property
    def is_consonant(self) -> bool:
        return self.role in (UnitRole.INITIAL_ONLY, UnitRole.FINAL_CAPABLE)

    @property
    def is_vowel(self) -> bool:
        return self.role is UnitRole.MEDIAL_ONLY


Event = Union[PhoneticUnit, ControlTag]
