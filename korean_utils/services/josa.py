from __future__ import annotations

"""Korean particle (josa) attachment.

The particle form depends only on whether the preceding word ends in a
consonant sound. Digits and Latin letters are judged by how they are read
aloud in Korean (3 "삼" ends in a consonant, 2 "이" does not).

Primary API:
  - Josa
  - attach_josa(text, josa)
"""

from enum import Enum
from typing import Final, Optional

from korean_utils.domain.syllable import Syllable, is_hangul


# Digits read with a final consonant: 영 일 삼 육 칠 팔
_CONSONANT_DIGITS: Final[frozenset[str]] = frozenset("013678")
# Word-final Latin letters read with a final consonant (book -> 북, magic -> 매직)
_CONSONANT_LETTERS: Final[frozenset[str]] = frozenset("bcklmnpt")


class Josa(Enum):
    """Particle pairs as (after consonant, after vowel)."""

    EUN_NEUN = ("은", "는")
    I_GA = ("이", "가")
    EUL_REUL = ("을", "를")
    GWA_WA = ("과", "와")
    EURO_RO = ("으로", "로")
    A_YA = ("아", "야")

    @property
    def after_consonant(self) -> str:
        return self.value[0]

    @property
    def after_vowel(self) -> str:
        return self.value[1]

    def pick(self, ends_with_consonant: bool) -> str:
        return self.after_consonant if ends_with_consonant else self.after_vowel


def ends_with_consonant(text: str) -> bool:
    """True when the last character of `text` is read with a final consonant."""
    last = text[-1]
    if last.isascii() and last.isdigit():
        return last in _CONSONANT_DIGITS
    if last.isascii() and last.isalpha():
        return last.lower() in _CONSONANT_LETTERS
    if is_hangul(last):
        return Syllable.from_character(last).tail is not None
    return False


def attach_josa(text: Optional[str], josa: Josa) -> str:
    """Append the form of `josa` that fits `text`.

    Example:
        attach_josa("사슴", Josa.EUN_NEUN) -> "사슴은"
        attach_josa("TV", Josa.EUN_NEUN) -> "TV는"
    """
    if not text:
        return ""
    return text + josa.pick(ends_with_consonant(text))
