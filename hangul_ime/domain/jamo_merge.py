from __future__ import annotations

"""Compound consonant / diphthong resolver (domain layer).

`resolve(role, a, b)` merges two compatibility jamo of the same role into the
precomposed compound jamo, or returns None when no merge exists. "No merge" is
an ordinary answer, not an error.
"""

from typing import Final, Optional

from hangul_ime.domain.enums import SlotRole


# Tense initials formed by doubling a consonant
INITIAL_COMBINE: Final[dict[tuple[str, str], str]] = {
    ("ㄱ", "ㄱ"): "ㄲ",
    ("ㄷ", "ㄷ"): "ㄸ",
    ("ㅂ", "ㅂ"): "ㅃ",
    ("ㅅ", "ㅅ"): "ㅆ",
    ("ㅈ", "ㅈ"): "ㅉ",
}

# Diphthongs (front + back -> compound vowel)
MEDIAL_COMBINE: Final[dict[tuple[str, str], str]] = {
    ("ㅗ", "ㅏ"): "ㅘ", ("ㅗ", "ㅐ"): "ㅙ", ("ㅗ", "ㅣ"): "ㅚ",
    ("ㅜ", "ㅓ"): "ㅝ", ("ㅜ", "ㅔ"): "ㅞ", ("ㅜ", "ㅣ"): "ㅟ",
    ("ㅡ", "ㅣ"): "ㅢ",
}

# Compound finals. ㄲ/ㅆ are valid finals too, so doubling is included.
FINAL_COMBINE: Final[dict[tuple[str, str], str]] = {
    ("ㄱ", "ㄱ"): "ㄲ",
    ("ㄱ", "ㅅ"): "ㄳ",
    ("ㄴ", "ㅈ"): "ㄵ", ("ㄴ", "ㅎ"): "ㄶ",
    ("ㄹ", "ㄱ"): "ㄺ", ("ㄹ", "ㅁ"): "ㄻ", ("ㄹ", "ㅂ"): "ㄼ", ("ㄹ", "ㅅ"): "ㄽ",
    ("ㄹ", "ㅌ"): "ㄾ", ("ㄹ", "ㅍ"): "ㄿ", ("ㄹ", "ㅎ"): "ㅀ",
    ("ㅂ", "ㅅ"): "ㅄ",
    ("ㅅ", "ㅅ"): "ㅆ",
}

_TABLES: Final[dict[SlotRole, dict[tuple[str, str], str]]] = {
    SlotRole.INITIAL: INITIAL_COMBINE,
    SlotRole.MEDIAL: MEDIAL_COMBINE,
    SlotRole.FINAL: FINAL_COMBINE,
}


def resolve(role: SlotRole, a: Optional[str], b: Optional[str]) -> Optional[str]:
    """Return the compound of `a` + `b` for `role`, or None if they do not merge."""
    if not a or not b:
        return None
    return _TABLES[role].get((a, b))
