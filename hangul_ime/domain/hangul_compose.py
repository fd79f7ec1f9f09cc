from __future__ import annotations

"""Hangul composition helpers (domain layer).

This module is the Syllable Composer used by the automaton.

It centralises:
- Hangul Jamo ordering constants (compatibility jamo)
- Pure functions for composing LVT syllables
- Rendering of a partially-filled block (bare jamo when no syllable exists)

Primary API:
- compose_lvt(lead, vowel, tail)
- render_block(lead, vowel, tail)
"""

from typing import Final, Optional


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

# Silent initial inserted in front of a bare vowel (ㅣ -> 이)
NULL_INITIAL: Final[str] = "ㅇ"

# "No final" sentinel accepted by compose_lvt
NO_FINAL: Final[str] = ""

_S_BASE: Final[int] = 0xAC00
_V_COUNT: Final[int] = 21
_T_COUNT: Final[int] = 28


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}


# -----------------------------------------------------------------------------
# Domain logic
# -----------------------------------------------------------------------------

def is_valid_initial(jamo: str) -> bool:
    return jamo in _CHO_MAP


def is_valid_medial(jamo: str) -> bool:
    return jamo in _JUNG_MAP


def is_valid_final(jamo: str) -> bool:
    """True for a real trailing consonant (the "no final" sentinel excluded)."""
    return bool(jamo) and jamo in _JONG_MAP


def compose_lvt(lead: Optional[str], vowel: Optional[str], tail: Optional[str] = NO_FINAL) -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if the combination is invalid.

    Notes:
        This uses the Unicode Hangul Syllables algorithm:
        SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    """
    l = (lead or "").strip()
    v = (vowel or "").strip()
    t = (tail or "").strip()

    if not l or not v:
        return ""

    li = _CHO_MAP.get(l)
    vi = _JUNG_MAP.get(v)
    ti = _JONG_MAP.get(t)

    if li is None or vi is None or ti is None:
        return ""

    return chr(_S_BASE + (li * _V_COUNT + vi) * _T_COUNT + ti)


def compose_cv(lead: str, vowel: str) -> str:
    """Compose a Hangul syllable from a leading consonant and a vowel."""
    return compose_lvt(lead, vowel, NO_FINAL)


def render_block(lead: Optional[str], vowel: Optional[str], tail: Optional[str] = NO_FINAL) -> str:
    """Render a block for commit or preview.

    A block with both an initial and a medial composes to a syllable. Blocks that
    cannot form one (a lone consonant, a suppressed bare vowel) render as their
    compatibility jamo, in slot order.
    """
    syllable = compose_lvt(lead, vowel, tail)
    if syllable:
        return syllable
    return "".join(j for j in (lead, vowel, tail) if j)
