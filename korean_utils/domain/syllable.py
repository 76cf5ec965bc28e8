from __future__ import annotations

"""Syllable grapheme model (domain layer).

A Syllable holds up to three jamo (lead, vowel, tail) or a single
non-Hangul passthrough character. Legal shapes:

  - empty
  - one lone jamo of any family
  - lead + vowel
  - lead + vowel + tail

Primary API:
  - Syllable.from_character(ch)
  - Syllable.scalar
  - is_hangul(ch)
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Final, Optional

from korean_utils.domain.errors import ConstructionError
from korean_utils.domain.jamo import TAIL_COUNT, VOWEL_COUNT, Lead, Tail, Vowel


# Unicode Hangul syllable constants
HANGUL_BEGIN: Final[int] = 0xAC00
HANGUL_END: Final[int] = 0xD7A3


@total_ordering
@dataclass(frozen=True, eq=False)
class Syllable:
    """One grapheme: up to three jamo, or a single passthrough character.

    Two syllables are equal when they represent the same character, so a lone
    ㄱ compares equal whether it sits in the lead or the tail slot.
    """

    lead: Optional[Lead] = None
    vowel: Optional[Vowel] = None
    tail: Optional[Tail] = None
    char: Optional[str] = None  # passthrough character; only set when no jamo is present

    def __post_init__(self) -> None:
        if self.lead is None:
            if self.vowel is not None and self.tail is not None:
                raise ConstructionError("If lead is not given, then vowel and tail must not both be given.")
        elif self.vowel is None and self.tail is not None:
            raise ConstructionError("If lead is given and vowel is not given, then tail must not be given.")

        if self.char is not None:
            if self.has_jamo:
                raise ConstructionError("A passthrough character cannot be combined with jamo fields.")
            if len(self.char) != 1:
                raise ConstructionError("A passthrough character must be exactly one character, got %r" % (self.char,))

    # ---------------------------
    # Construction
    # ---------------------------

    @classmethod
    def from_character(cls, character: str) -> Syllable:
        """Classify a single character.

        Precomposed syllables are split arithmetically. Bare jamo are looked up in
        the three character tables; a consonant that is valid as both lead and tail
        resolves to lead. Anything else becomes a passthrough syllable.
        """
        code = ord(character)
        if HANGUL_BEGIN <= code <= HANGUL_END:
            offset = code - HANGUL_BEGIN
            lead = Lead.from_index(offset // (VOWEL_COUNT * TAIL_COUNT))
            vowel = Vowel.from_index((offset % (VOWEL_COUNT * TAIL_COUNT)) // TAIL_COUNT)
            tail_index = offset % TAIL_COUNT
            tail = Tail.from_index(tail_index - 1) if tail_index else None
            return cls(lead, vowel, tail)

        lead = Lead.find(character)
        vowel = Vowel.find(character)
        tail = Tail.find(character) if lead is None else None
        if lead is None and vowel is None and tail is None:
            return cls(char=character)
        return cls(lead, vowel, tail)

    # ---------------------------
    # Shape helpers
    # ---------------------------

    @property
    def has_jamo(self) -> bool:
        return self.lead is not None or self.vowel is not None or self.tail is not None

    @property
    def is_empty(self) -> bool:
        return not self.has_jamo and self.char is None

    @property
    def is_complete(self) -> bool:
        """True for a lead+vowel(+tail) block."""
        return self.lead is not None and self.vowel is not None

    @property
    def scalar(self) -> Optional[str]:
        """The character this syllable currently represents, or None when empty."""
        if not self.has_jamo:
            return self.char

        if self.is_complete:
            code = HANGUL_BEGIN + self.lead.index * VOWEL_COUNT * TAIL_COUNT + self.vowel.index * TAIL_COUNT
            if self.tail is not None:
                code += self.tail.index + 1
            return chr(code)

        lone = self.lead or self.vowel or self.tail
        return lone.compatibility

    # ---------------------------
    # Dunder
    # ---------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Syllable):
            return NotImplemented
        return self.scalar == other.scalar

    def __hash__(self) -> int:
        return hash(self.scalar)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Syllable):
            return NotImplemented
        mine, theirs = self.scalar, other.scalar
        if mine is None:
            return theirs is not None
        if theirs is None:
            return False
        return mine < theirs

    def __str__(self) -> str:
        return self.scalar or ""


EMPTY: Final[Syllable] = Syllable()


def is_hangul(character: Optional[str]) -> bool:
    """True for a precomposed syllable or any bare jamo (either encoding)."""
    if not character:
        return False
    if HANGUL_BEGIN <= ord(character) <= HANGUL_END:
        return True
    return Lead.find(character) is not None or Vowel.find(character) is not None or Tail.find(character) is not None


def convert(text: Optional[str]) -> list[Syllable]:
    """Return one Syllable per character of `text`."""
    if not text:
        return []
    return [Syllable.from_character(ch) for ch in text]
