from __future__ import annotations

"""Ordered diphthong rules for a second vowel typed onto an open medial.

Each rule is an explicit lookup keyed by (current medial1, incoming vowel).
Rules are tried in order and the first hit wins; later rules assume the earlier
ones already failed.

Outcomes:
  - rewrite: medial1 becomes a single precomposed vowel, medial2 stays empty
  - two-slot: medial1 becomes `base`, medial2 becomes the incoming vowel
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Final, Optional

from hangul_ime.domain.enums import SlotRole


class RuleKind(Enum):
    REWRITE = auto()
    TWO_SLOT = auto()


@dataclass(frozen=True)
class DiphthongRule:
    name: str
    kind: RuleKind
    table: dict[tuple[str, str], str]


@dataclass(frozen=True)
class DiphthongOutcome:
    rule: str
    medial1: str
    medial2: Optional[str] = None

    @property
    def is_rewrite(self) -> bool:
        return self.medial2 is None


Resolver = Callable[[SlotRole, Optional[str], Optional[str]], Optional[str]]


# y + vowel: ㅣ is the y-glide onset
Y_GLIDE: Final[dict[str, str]] = {
    "ㅏ": "ㅑ",
    "ㅓ": "ㅕ",
    "ㅗ": "ㅛ",
    "ㅜ": "ㅠ",
    "ㅐ": "ㅒ",
    "ㅔ": "ㅖ",
}

# w + vowel: ㅡ is the w-glide onset; value is the rounding base
W_GLIDE: Final[dict[str, str]] = {
    "ㅏ": "ㅗ",
    "ㅐ": "ㅗ",
    "ㅓ": "ㅜ",
    "ㅔ": "ㅜ",
    "ㅣ": "ㅜ",
}

ALWAYS_RULES: Final[tuple[DiphthongRule, ...]] = (
    DiphthongRule(
        name="y-glide",
        kind=RuleKind.REWRITE,
        table={("ㅣ", v): glide for v, glide in Y_GLIDE.items()},
    ),
    DiphthongRule(
        name="w-glide",
        kind=RuleKind.TWO_SLOT,
        table={("ㅡ", v): base for v, base in W_GLIDE.items()},
    ),
    # Romanization digraphs: eo, yeo, eu, ae, yae, oe, wo
    DiphthongRule(
        name="digraph",
        kind=RuleKind.REWRITE,
        table={
            ("ㅔ", "ㅗ"): "ㅓ",
            ("ㅖ", "ㅗ"): "ㅕ",
            ("ㅔ", "ㅜ"): "ㅡ",
            ("ㅏ", "ㅔ"): "ㅐ",
            ("ㅑ", "ㅔ"): "ㅒ",
            ("ㅗ", "ㅔ"): "ㅚ",
            ("ㅡ", "ㅗ"): "ㅝ",
        },
    ),
    # ui -> ㅢ, oi -> ㅚ
    DiphthongRule(
        name="rounding",
        kind=RuleKind.TWO_SLOT,
        table={
            ("ㅜ", "ㅣ"): "ㅡ",
            ("ㅗ", "ㅣ"): "ㅗ",
        },
    ),
)

# Only with compound-double-chars enabled
DOUBLE_CHAR_RULES: Final[tuple[DiphthongRule, ...]] = (
    DiphthongRule(
        name="double-vowel",
        kind=RuleKind.REWRITE,
        table={
            ("ㅗ", "ㅗ"): "ㅜ",
            ("ㅔ", "ㅔ"): "ㅣ",
        },
    ),
)


def _apply(rules: tuple[DiphthongRule, ...], medial1: str, incoming: str) -> Optional[DiphthongOutcome]:
    for rule in rules:
        value = rule.table.get((medial1, incoming))
        if value is None:
            continue
        if rule.kind is RuleKind.REWRITE:
            return DiphthongOutcome(rule=rule.name, medial1=value)
        return DiphthongOutcome(rule=rule.name, medial1=value, medial2=incoming)
    return None


def match_diphthong(
    medial1: str,
    incoming: str,
    *,
    resolver: Resolver,
    compound_double_chars: bool = False,
) -> Optional[DiphthongOutcome]:
    """Return how `incoming` extends `medial1`, or None when it does not."""
    outcome = _apply(ALWAYS_RULES, medial1, incoming)
    if outcome is not None or not compound_double_chars:
        return outcome

    outcome = _apply(DOUBLE_CHAR_RULES, medial1, incoming)
    if outcome is not None:
        return outcome

    if resolver(SlotRole.MEDIAL, medial1, incoming) is not None:
        return DiphthongOutcome(rule="merge", medial1=medial1, medial2=incoming)
    return None
