from __future__ import annotations

"""Six-slot state of one in-progress syllable block.

Slots, ordered by role and rank:
    initial1, initial2   pending compound initial
    medial1,  medial2    pending diphthong
    final1,   final2     pending compound final

A rank-2 slot is only ever filled on top of its rank-1 slot. The composer never
sees raw slots, only the effective value per role (the merge of both ranks).
"""

from dataclasses import dataclass
from typing import Callable, Final, Optional

from hangul_ime.domain.enums import SlotRole, SlotState
from hangul_ime.domain.hangul_compose import NO_FINAL, render_block
from hangul_ime.domain.jamo_merge import resolve

Resolver = Callable[[SlotRole, Optional[str], Optional[str]], Optional[str]]

SLOT_NAMES: Final[tuple[str, ...]] = (
    "initial1", "initial2",
    "medial1", "medial2",
    "final1", "final2",
)

ROLE_SLOTS: Final[dict[SlotRole, tuple[str, str]]] = {
    SlotRole.INITIAL: ("initial1", "initial2"),
    SlotRole.MEDIAL: ("medial1", "medial2"),
    SlotRole.FINAL: ("final1", "final2"),
}

_RANK1_OF: Final[dict[str, str]] = {second: first for first, second in ROLE_SLOTS.values()}


@dataclass(frozen=True)
class Slot:
    state: SlotState = SlotState.EMPTY
    jamo: Optional[str] = None

    @classmethod
    def filled(cls, jamo: str) -> "Slot":
        return cls(state=SlotState.FILLED, jamo=jamo)

    @property
    def is_filled(self) -> bool:
        return self.state is SlotState.FILLED


EMPTY_SLOT: Final[Slot] = Slot()


def _check_name(name: str) -> None:
    if name not in SLOT_NAMES:
        raise ValueError("Unknown slot name: %r" % (name,))


class CompositionBuffer:
    """The open block. Mutated only by the automaton."""

    def __init__(self, resolver: Resolver = resolve) -> None:
        self._resolver = resolver
        self._slots: dict[str, Slot] = {name: EMPTY_SLOT for name in SLOT_NAMES}
        # Sticky marker: the next vowel must not get an auto-inserted initial.
        self.suppress_auto_initial: bool = False
        # initial1 holds the null initial inserted for a bare vowel.
        self.auto_initial: bool = False

    @classmethod
    def empty(cls, resolver: Resolver = resolve) -> "CompositionBuffer":
        return cls(resolver=resolver)

    # ---------------------------
    # Read access
    # ---------------------------

    def slot(self, name: str) -> Slot:
        _check_name(name)
        return self._slots[name]

    def get(self, name: str) -> Optional[str]:
        s = self.slot(name)
        return s.jamo if s.is_filled else None

    def has(self, name: str) -> bool:
        return self.slot(name).is_filled

    @property
    def initial1(self) -> Optional[str]:
        return self.get("initial1")

    @property
    def initial2(self) -> Optional[str]:
        return self.get("initial2")

    @property
    def medial1(self) -> Optional[str]:
        return self.get("medial1")

    @property
    def medial2(self) -> Optional[str]:
        return self.get("medial2")

    @property
    def final1(self) -> Optional[str]:
        return self.get("final1")

    @property
    def final2(self) -> Optional[str]:
        return self.get("final2")

    @property
    def is_empty(self) -> bool:
        return not any(s.state is not SlotState.EMPTY for s in self._slots.values())

    def effective(self, role: SlotRole) -> Optional[str]:
        """Return the composed value for `role`, or None when its slots are empty."""
        first_name, second_name = ROLE_SLOTS[role]
        first = self.get(first_name)
        second = self.get(second_name)
        if first is None:
            return None
        if second is None:
            return first
        merged = self._resolver(role, first, second)
        # Rank-2 slots are only filled after a successful merge check.
        return merged if merged is not None else first

    def snapshot(self) -> tuple[Optional[str], ...]:
        return tuple(self.get(name) for name in SLOT_NAMES)

    def render(self, renderer: Callable[..., str] = render_block) -> str:
        if self.is_empty:
            return ""
        return renderer(
            self.effective(SlotRole.INITIAL),
            self.effective(SlotRole.MEDIAL),
            self.effective(SlotRole.FINAL) or NO_FINAL,
        )

    # ---------------------------
    # Mutation (automaton only)
    # ---------------------------

    def fill(self, name: str, jamo: str) -> None:
        _check_name(name)
        first = _RANK1_OF.get(name)
        if first is not None and not self.has(first):
            raise ValueError("Cannot fill %s before %s" % (name, first))
        self._slots[name] = Slot.filled(jamo)

    def clear(self, name: str) -> None:
        _check_name(name)
        self._slots[name] = EMPTY_SLOT
        if name == "initial1":
            self.auto_initial = False

    def mark_pending_clear(self, name: str) -> str:
        """Claim a filled slot for donation and return its jamo."""
        s = self.slot(name)
        if not s.is_filled or s.jamo is None:
            raise ValueError("Cannot donate empty slot %s" % (name,))
        self._slots[name] = Slot(state=SlotState.PENDING_CLEAR, jamo=s.jamo)
        return s.jamo

    def clear_pending(self) -> None:
        for name, s in self._slots.items():
            if s.state is SlotState.PENDING_CLEAR:
                self._slots[name] = EMPTY_SLOT

    def __repr__(self) -> str:
        filled = ", ".join(
            "%s=%s" % (name, self.get(name)) for name in SLOT_NAMES if self.has(name)
        )
        return "CompositionBuffer(%s)" % filled
