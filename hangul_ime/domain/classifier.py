from __future__ import annotations

"""Jamo classifier: compatibility jamo -> PhoneticUnit with its role."""

from typing import Optional

from hangul_ime.domain.enums import PhoneticUnit, UnitRole
from hangul_ime.domain.hangul_compose import is_valid_final, is_valid_initial, is_valid_medial


def role_for_jamo(jamo: str) -> Optional[UnitRole]:
    """Return the UnitRole of a single compatibility jamo, or None.

    Compound finals (ㄳ, ㄺ, ...) are not input units: they only arise from
    merging two finals, and they cannot start a block.
    """
    j = (jamo or "").strip()
    if is_valid_medial(j):
        return UnitRole.MEDIAL_ONLY
    if is_valid_initial(j):
        return UnitRole.FINAL_CAPABLE if is_valid_final(j) else UnitRole.INITIAL_ONLY
    return None


def classify(jamo: str) -> Optional[PhoneticUnit]:
    role = role_for_jamo(jamo)
    if role is None:
        return None
    return PhoneticUnit(jamo=jamo.strip(), role=role)
