from __future__ import annotations

"""Hangul decomposition helpers (domain layer).

Primary API:
  - decompose_syllable(syllable, use_compatibility, split_compounds)
  - decompose(text, use_compatibility, split_compounds)
"""

from typing import Optional

from korean_utils.domain.jamo import Jamo
from korean_utils.domain.syllable import Syllable, is_hangul


def decompose_syllable(
    syllable: Syllable,
    use_compatibility: bool = True,
    split_compounds: bool = True,
) -> str:
    """Expand a syllable into its jamo.

    Args:
        syllable: the syllable to expand
        use_compatibility: emit compatibility jamo (ㄱ) instead of conjoining jamo (ᄀ)
        split_compounds: emit the base jamo of compounds (ㄺ -> ㄹㄱ, ㅘ -> ㅗㅏ)

    Returns:
        The jamo in lead, vowel, tail order. A syllable without jamo yields its
        literal character, or "" when it is empty.
    """
    parts = [
        _jamo_text(jamo, use_compatibility, split_compounds)
        for jamo in (syllable.lead, syllable.vowel, syllable.tail)
        if jamo is not None
    ]
    if parts:
        return "".join(parts)
    return syllable.scalar or ""


def _jamo_text(jamo: Jamo, use_compatibility: bool, split_compounds: bool) -> str:
    if split_compounds:
        return jamo.components(use_compatibility)
    return jamo.compatibility if use_compatibility else jamo.conjoining


def decompose(
    text: Optional[str],
    use_compatibility: bool = True,
    split_compounds: bool = True,
) -> str:
    """Decompose every Hangul character of `text`; other characters pass through.

    Decomposing an already decomposed string returns it unchanged.

    Example:
        decompose("닭고기") -> "ㄷㅏㄹㄱㄱㅗㄱㅣ"
        decompose("닭고기", split_compounds=False) -> "ㄷㅏㄺㄱㅗㄱㅣ"
    """
    if not text:
        return ""

    out: list[str] = []
    for ch in text:
        if is_hangul(ch):
            out.append(decompose_syllable(Syllable.from_character(ch), use_compatibility, split_compounds))
        else:
            out.append(ch)
    return "".join(out)
