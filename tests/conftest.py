# tests/conftest.py
from typing import Iterable, Optional

import pytest

from hangul_ime.domain.automaton import CompositionAutomaton, StepResult
from hangul_ime.domain.classifier import classify
from hangul_ime.domain.enums import ControlTag, Event, PhoneticUnit


def unit(jamo: str) -> PhoneticUnit:
    u = classify(jamo)
    assert u is not None, "not an input jamo: {!r}".format(jamo)
    return u


def events(seq: Iterable[object]) -> list[Optional[Event]]:
    """Turn a mix of jamo strings and ControlTags into events.

    A string is split into single jamo, so "ㅎㅏㄴ" is three events.
    """
    out: list[Optional[Event]] = []
    for item in seq:
        if isinstance(item, ControlTag) or item is None:
            out.append(item)
        else:
            out.extend(unit(ch) for ch in str(item))
    return out


def feed(automaton: CompositionAutomaton, *seq: object) -> list[StepResult]:
    return [automaton.feed(e) for e in events(seq)]


@pytest.fixture
def committed() -> list[str]:
    return []


@pytest.fixture
def automaton(committed) -> CompositionAutomaton:
    return CompositionAutomaton(sink=committed.append)


@pytest.fixture
def compound_automaton(committed) -> CompositionAutomaton:
    return CompositionAutomaton(sink=committed.append, compound_double_chars=True)
