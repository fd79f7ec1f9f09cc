"""
Consonant events: the five ordered branches (start block, compound initial,
final with lookahead, compound final, commit-and-restart).
"""

import pytest

from conftest import feed, unit
from hangul_ime.domain.enums import ControlTag, SlotRole


def test_first_consonant_starts_block(automaton, committed):
    [step] = feed(automaton, "ㄱ")
    assert step.committed is None
    assert step.preview == "ㄱ"
    assert automaton.buffer.snapshot() == ("ㄱ", None, None, None, None, None)
    assert committed == []


def test_doubled_consonant_forms_compound_initial(automaton, committed):
    feed(automaton, "ㄱㄱ")
    b = automaton.buffer
    assert (b.initial1, b.initial2) == ("ㄱ", "ㄱ")
    assert b.effective(SlotRole.INITIAL) == "ㄲ"
    assert automaton.preview() == "ㄲ"

    feed(automaton, "ㅏ")
    assert automaton.preview() == "까"
    assert committed == []


def test_consonants_that_do_not_merge_commit(automaton, committed):
    steps = feed(automaton, "ㄱㄴ")
    assert steps[1].committed == "ㄱ"
    assert committed == ["ㄱ"]
    assert automaton.buffer.snapshot() == ("ㄴ", None, None, None, None, None)


def test_third_doubling_key_starts_new_block(automaton, committed):
    feed(automaton, "ㄱㄱㄱ")
    assert committed == ["ㄲ"]
    assert automaton.buffer.initial1 == "ㄱ"
    assert automaton.buffer.initial2 is None


def test_consonant_after_vowel_becomes_final(automaton, committed):
    feed(automaton, "ㅎㅏㄴ")
    assert automaton.buffer.final1 == "ㄴ"
    assert automaton.preview() == "한"
    assert committed == []


def test_compound_initial_not_formed_after_medial(automaton):
    feed(automaton, "ㄱㅏㄱ")
    b = automaton.buffer
    assert b.initial2 is None
    assert b.final1 == "ㄱ"


def test_initial_only_consonant_cannot_be_final(automaton, committed):
    # ㄸ would make an invalid syllable: commit instead of corrupting the block
    steps = feed(automaton, "ㄱㅏㄸ")
    assert steps[-1].committed == "가"
    assert committed == ["가"]
    assert automaton.buffer.snapshot() == ("ㄸ", None, None, None, None, None)


def test_compound_final(automaton, committed):
    feed(automaton, "ㄷㅏㄹㄱ")
    b = automaton.buffer
    assert (b.final1, b.final2) == ("ㄹ", "ㄱ")
    assert b.effective(SlotRole.FINAL) == "ㄺ"
    assert automaton.preview() == "닭"
    assert committed == []


def test_doubled_final(automaton):
    feed(automaton, "ㄱㅏㄱㄱ")
    assert automaton.buffer.effective(SlotRole.FINAL) == "ㄲ"


def test_final_that_does_not_merge_commits_with_final_kept(automaton, committed):
    feed(automaton, "ㅎㅏㄴㄱ")
    assert committed == ["한"]
    assert automaton.buffer.snapshot() == ("ㄱ", None, None, None, None, None)


def test_consonant_after_compound_final_commits(automaton, committed):
    feed(automaton, "ㄷㅏㄹㄱㄱ")
    assert committed == ["닭"]
    assert automaton.buffer.initial1 == "ㄱ"


def test_consonant_fills_initial_of_vowel_only_block(automaton, committed):
    feed(automaton, ControlTag.SUPPRESS_AUTO_INITIAL, "ㅏ")
    assert automaton.buffer.initial1 is None

    feed(automaton, "ㄱ")
    assert automaton.buffer.snapshot()[:3] == ("ㄱ", None, "ㅏ")
    assert automaton.preview() == "가"
    assert committed == []


def test_accept_consonant_rejects_vowel(automaton):
    with pytest.raises(ValueError):
        automaton.accept_consonant(unit("ㅏ"))
