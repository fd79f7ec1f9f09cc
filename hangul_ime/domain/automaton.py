from __future__ import annotations

"""Composition automaton (domain layer, no I/O).

Consumes one classified event at a time, mutates the open CompositionBuffer or
commits it to the injected sink and opens a new one. All decision points are
pure predicates (merge succeeds / compose succeeds) evaluated as ordered guard
clauses: the first matching branch fires and the order matters, since later
branches assume earlier ones failed.

Primary API:
- CompositionAutomaton.feed(event) -> StepResult
- accept_consonant(unit) / accept_vowel(unit)
- reset() / suppress_auto_initial() / flush() / backspace()
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from hangul_ime.domain.composition_buffer import CompositionBuffer, Resolver
from hangul_ime.domain.diphthongs import match_diphthong
from hangul_ime.domain.enums import ControlTag, Event, PhoneticUnit, SlotRole
from hangul_ime.domain.hangul_compose import NO_FINAL, NULL_INITIAL, compose_lvt, render_block
from hangul_ime.domain.jamo_merge import resolve

logger = logging.getLogger(__name__)

Composer = Callable[[Optional[str], Optional[str], Optional[str]], str]
Renderer = Callable[[Optional[str], Optional[str], Optional[str]], str]
CommitSink = Callable[[str], None]

_BACKSPACE_ORDER = ("final2", "final1", "medial2", "medial1", "initial2", "initial1")


@dataclass(frozen=True)
class StepResult:
    """Outcome of one event: the committed block text (if any) and the live preview."""

    committed: Optional[str]
    preview: str


class CompositionAutomaton:
    """Owns exactly one open CompositionBuffer.

    Collaborators are injected so independent instances share no state:
      - composer: (initial, medial, final) -> syllable or "" when invalid
      - resolver: (role, a, b) -> compound jamo or None
      - renderer: renders a committed/preview block (falls back to bare jamo)
      - sink: receives each committed block exactly once, in event order
    """

    def __init__(
        self,
        *,
        sink: Optional[CommitSink] = None,
        composer: Composer = compose_lvt,
        resolver: Resolver = resolve,
        renderer: Renderer = render_block,
        compound_double_chars: bool = False,
        null_initial: str = NULL_INITIAL,
    ) -> None:
        self._sink = sink
        self._composer = composer
        self._resolver = resolver
        self._renderer = renderer
        self._compound_double_chars = bool(compound_double_chars)
        self._null_initial = null_initial
        self._buffer = CompositionBuffer.empty(resolver)
        self._commit_count = 0

    # ---------------------------
    # Read access
    # ---------------------------

    @property
    def buffer(self) -> CompositionBuffer:
        return self._buffer

    @property
    def compound_double_chars(self) -> bool:
        return self._compound_double_chars

    @property
    def commit_count(self) -> int:
        return self._commit_count

    def preview(self) -> str:
        return self._buffer.render(self._renderer)

    # ---------------------------
    # Dispatch
    # ---------------------------

    def feed(self, event: Optional[Event]) -> StepResult:
        """Process one classified event.

        `None` stands for an unclassifiable key and is handled as RESET.
        """
        committed: Optional[str] = None
        if event is None or event is ControlTag.RESET:
            self.reset()
        elif event is ControlTag.SUPPRESS_AUTO_INITIAL:
            committed = self.suppress_auto_initial()
        elif isinstance(event, PhoneticUnit):
            if event.is_vowel:
                committed = self.accept_vowel(event)
            else:
                committed = self.accept_consonant(event)
        else:
            raise TypeError("Unsupported event: %r" % (event,))
        return StepResult(committed=committed, preview=self.preview())

    # ---------------------------
    # Consonants
    # ---------------------------

    def accept_consonant(self, unit: PhoneticUnit) -> Optional[str]:
        if not unit.is_consonant:
            raise ValueError("Not a consonant unit: %r" % (unit,))

        b = self._buffer
        jamo = unit.jamo
        # A consonant arriving first cancels a pending vowel-only marker.
        b.suppress_auto_initial = False

        if not b.has("initial1"):
            b.fill("initial1", jamo)
            logger.debug("consonant %s: start block", jamo)
            return None

        if (
            not b.has("initial2")
            and not b.has("medial1")
            and not b.has("medial2")
            and self._resolver(SlotRole.INITIAL, b.initial1, jamo) is not None
        ):
            b.fill("initial2", jamo)
            logger.debug("consonant %s: compound initial", jamo)
            return None

        initial = b.effective(SlotRole.INITIAL)
        medial = b.effective(SlotRole.MEDIAL)

        if b.has("medial1") and not b.has("final1") and self._composes(initial, medial, jamo):
            b.fill("final1", jamo)
            logger.debug("consonant %s: final", jamo)
            return None

        if b.has("final1") and not b.has("final2"):
            merged = self._resolver(SlotRole.FINAL, b.final1, jamo)
            if merged is not None and self._composes(initial, medial, merged):
                b.fill("final2", jamo)
                logger.debug("consonant %s: compound final %s", jamo, merged)
                return None

        committed = self._commit()
        self._buffer.fill("initial1", jamo)
        logger.debug("consonant %s: committed %r, new block", jamo, committed)
        return committed

    # ---------------------------
    # Vowels
    # ---------------------------

    def accept_vowel(self, unit: PhoneticUnit) -> Optional[str]:
        if not unit.is_vowel:
            raise ValueError("Not a vowel unit: %r" % (unit,))

        b = self._buffer
        jamo = unit.jamo

        if not b.has("medial1"):
            if not b.has("initial1"):
                if b.suppress_auto_initial:
                    logger.debug("vowel %s: auto initial suppressed", jamo)
                else:
                    b.fill("initial1", self._null_initial)
                    b.auto_initial = True
            b.suppress_auto_initial = False
            b.fill("medial1", jamo)
            logger.debug("vowel %s: medial", jamo)
            return None

        if not b.has("medial2") and not b.has("final1") and not b.has("final2"):
            outcome = match_diphthong(
                b.medial1 or "",
                jamo,
                resolver=self._resolver,
                compound_double_chars=self._compound_double_chars,
            )
            if outcome is not None:
                b.fill("medial1", outcome.medial1)
                if not outcome.is_rewrite:
                    b.fill("medial2", jamo)
                logger.debug("vowel %s: %s -> %s", jamo, outcome.rule, b.effective(SlotRole.MEDIAL))
                return None

        return self._commit_with_resyllabification(jamo)

    def _commit_with_resyllabification(self, vowel: str) -> Optional[str]:
        b = self._buffer
        donor: Optional[str] = None
        if b.has("final2"):
            donor = "final2"
        elif b.has("final1"):
            donor = "final1"

        if donor is not None:
            initial = b.mark_pending_clear(donor)
            b.clear_pending()
        else:
            initial = self._null_initial

        committed = self._commit()
        nb = self._buffer
        nb.fill("initial1", initial)
        nb.auto_initial = donor is None
        nb.fill("medial1", vowel)
        logger.debug("vowel %s: committed %r, carried initial %s", vowel, committed, initial)
        return committed

    # ---------------------------
    # Control
    # ---------------------------

    def reset(self) -> None:
        """Discard the open block without committing it."""
        if not self._buffer.is_empty:
            logger.debug("reset: discarded %r", self._buffer)
        self._buffer = CompositionBuffer.empty(self._resolver)

    def suppress_auto_initial(self) -> Optional[str]:
        """Commit the open block and mark the next one as vowel-only."""
        committed = self.flush()
        self._buffer.suppress_auto_initial = True
        return committed

    def flush(self) -> Optional[str]:
        """Commit the open block if it holds anything and open an empty one."""
        if self._buffer.is_empty:
            self._buffer = CompositionBuffer.empty(self._resolver)
            return None
        return self._commit()

    def backspace(self) -> bool:
        """Remove the most recently filled slot of the open block.

        Returns False when the block was already empty; committed text is the
        host's to edit.
        """
        b = self._buffer
        b.suppress_auto_initial = False
        for name in _BACKSPACE_ORDER:
            if not b.has(name):
                continue
            b.clear(name)
            if name == "medial1" and b.auto_initial:
                b.clear("initial1")
            logger.debug("backspace: cleared %s", name)
            return True
        return False

    # ---------------------------
    # Internals
    # ---------------------------

    def _composes(self, initial: Optional[str], medial: Optional[str], final: Optional[str]) -> bool:
        return bool(self._composer(initial, medial, final or NO_FINAL))

    def _commit(self) -> Optional[str]:
        """Hand the open block to the sink and open a fresh one."""
        text = self._buffer.render(self._renderer)
        self._buffer = CompositionBuffer.empty(self._resolver)
        if not text:
            return None
        self._commit_count += 1
        if self._sink is not None:
            self._sink(text)
        logger.debug("commit %r", text)
        return text
