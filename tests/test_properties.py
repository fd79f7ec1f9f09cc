"""
Exhaustive short sequences over a small alphabet: structural invariants
that must hold after every single event.
"""

from itertools import product

import pytest

from conftest import unit
from hangul_ime.domain.automaton import CompositionAutomaton
from hangul_ime.domain.composition_buffer import SLOT_NAMES
from hangul_ime.domain.enums import ControlTag, SlotState

ALPHABET = [
    unit("ㄱ"),
    unit("ㄹ"),
    unit("ㄸ"),
    unit("ㅏ"),
    unit("ㅡ"),
    unit("ㅣ"),
    ControlTag.RESET,
    ControlTag.SUPPRESS_AUTO_INITIAL,
]

RANK_PAIRS = (("initial1", "initial2"), ("medial1", "medial2"), ("final1", "final2"))


def _sequences(max_len):
    for n in range(1, max_len + 1):
        yield from product(ALPHABET, repeat=n)


def _check_buffer(buffer):
    for rank1, rank2 in RANK_PAIRS:
        if buffer.has(rank2):
            assert buffer.has(rank1), "{} set without {}".format(rank2, rank1)
    if buffer.has("final1"):
        assert buffer.has("medial1")
    for name in SLOT_NAMES:
        assert buffer.slot(name).state is not SlotState.PENDING_CLEAR


@pytest.mark.properties
@pytest.mark.parametrize("compound", [False, True])
def test_invariants_hold_after_every_event(compound):
    for seq in _sequences(4):
        committed = []
        a = CompositionAutomaton(sink=committed.append, compound_double_chars=compound)
        results = []
        for event in seq:
            results.append(a.feed(event))
            _check_buffer(a.buffer)
            assert results[-1].preview == a.preview()

        returned = [r.committed for r in results if r.committed is not None]
        assert returned == committed, seq
        assert a.commit_count == len(committed)
        assert all(committed)


@pytest.mark.properties
def test_flush_leaves_nothing_open():
    for seq in _sequences(3):
        committed = []
        a = CompositionAutomaton(sink=committed.append)
        for event in seq:
            a.feed(event)
        a.flush()
        assert a.buffer.is_empty
        assert a.preview() == ""
        assert len(committed) <= len(seq)
        if not any(isinstance(e, ControlTag) for e in seq):
            # nothing typed is lost without a RESET
            assert committed, seq
