from __future__ import annotations

"""Jamo-aware search (domain layer).

A probe matches a container syllable when every jamo slot the probe specifies
agrees with the container; unspecified slots are wildcards. This lets callers
search composed text with bare consonants ("ㅎㄱㄷ" in "홍길동") or partially
typed syllables ("홍ㄱ").

Primary API:
  - include(container, probe)
  - contains(text, query)
  - starts_with(text, prefix)
  - ends_with(text, suffix)
  - contains_hangul(text)
"""

from typing import Optional

from korean_utils.domain.jamo import Jamo, tail_for_lead
from korean_utils.domain.syllable import Syllable, convert, is_hangul


def include(container: Syllable, probe: Optional[Syllable]) -> bool:
    """True if `probe` is a (possibly partial) form of `container`.

    include(한, ㅎ) and include(한, 하) hold; include(한, ㄴ) does not, since a
    bare ㄴ is a lead and 한 has ㅎ in the lead slot.
    """
    if probe is None:
        return False
    if container.scalar is None:
        return probe.scalar is None
    if probe.scalar is None:
        return False
    if not container.has_jamo or not probe.has_jamo:
        return container.scalar == probe.scalar

    if probe.lead is not None and probe.lead is not container.lead:
        return False
    if probe.vowel is not None and probe.vowel is not container.vowel:
        return False
    return probe.tail is None or probe.tail is container.tail


def contains(text: Optional[str], query: Optional[str]) -> bool:
    """Jamo-aware substring test.

    Example:
        contains("홍길동", "ㅎㄱㄷ") -> True
        contains("홍길동", "김") -> False
    """
    if not text or not query or len(query) > len(text):
        return False

    text_syllables = convert(text)
    query_syllables = convert(query)

    for i in range(len(text_syllables) - len(query_syllables) + 1):
        if all(include(text_syllables[i + j], probe) for j, probe in enumerate(query_syllables)):
            return True
    return False


def contains_hangul(text: Optional[str]) -> bool:
    if not text:
        return False
    return any(is_hangul(ch) for ch in text)


# -----------------------------------------------------------------------------
# Prefix / suffix matching
# -----------------------------------------------------------------------------

def _affix_precheck(text: Optional[str], affix: Optional[str]) -> Optional[bool]:
    """Return a result for the trivial cases, or None when a scan is needed."""
    if affix is None:
        return False
    if not affix:
        return True
    if not text or len(affix) > len(text):
        return False
    return None


def _slot_mismatch(lenient: bool, text_jamo: Optional[Jamo], affix_jamo: Optional[Jamo]) -> bool:
    if text_jamo is None:
        return affix_jamo is not None
    if text_jamo is affix_jamo:
        return False
    # `lenient` only forgives a slot the affix leaves open
    return not lenient or affix_jamo is not None


def starts_with(text: Optional[str], prefix: Optional[str]) -> bool:
    """Jamo-aware prefix test.

    All prefix characters but the last must match exactly; the last may be an
    incomplete syllable (bare lead, or lead+vowel without tail).

    Example:
        starts_with("홍길동", "홍ㄱ") -> True
        starts_with("홍길동", "ㅎ길") -> False
    """
    trivial = _affix_precheck(text, prefix)
    if trivial is not None:
        return trivial

    last = len(prefix) - 1
    for i, (t, p) in enumerate(zip(text, prefix)):
        text_syllable = Syllable.from_character(t)
        prefix_syllable = Syllable.from_character(p)
        lenient = i == last
        if (
            _slot_mismatch(lenient, text_syllable.lead, prefix_syllable.lead)
            or _slot_mismatch(lenient, text_syllable.vowel, prefix_syllable.vowel)
            or _slot_mismatch(lenient, text_syllable.tail, prefix_syllable.tail)
        ):
            return False
    return True


def ends_with(text: Optional[str], suffix: Optional[str]) -> bool:
    """Jamo-aware suffix test.

    The mirror image of starts_with(): the first suffix character may be partial.
    A bare consonant there is read as a trailing consonant, because that is the
    position it occupies in context.

    Example:
        ends_with("홍길동", "ㅇ길동") -> True
        ends_with("홍길동", "길ㄷ") -> False
    """
    trivial = _affix_precheck(text, suffix)
    if trivial is not None:
        return trivial

    offset = len(text) - len(suffix)
    for i in range(len(suffix) - 1, -1, -1):
        text_syllable = Syllable.from_character(text[offset + i])
        suffix_syllable = Syllable.from_character(suffix[i])
        first = i == 0

        suffix_lead = suffix_syllable.lead
        suffix_tail = suffix_syllable.tail
        if first and _is_bare_lead(suffix_syllable):
            as_tail = tail_for_lead(suffix_lead)
            if as_tail is not None:
                suffix_lead, suffix_tail = None, as_tail

        if (
            _slot_mismatch(first, text_syllable.tail, suffix_tail)
            or _slot_mismatch(first, text_syllable.vowel, suffix_syllable.vowel)
            or _slot_mismatch(first, text_syllable.lead, suffix_lead)
        ):
            return False
    return True


def _is_bare_lead(syllable: Syllable) -> bool:
    return syllable.lead is not None and syllable.vowel is None and syllable.tail is None
