from __future__ import annotations

"""Hangul jamo tables (domain layer).

This module is the single source of truth for:
  - The three jamo families: Lead (choseong), Vowel (jungseong), Tail (jongseong)
  - Conjoining / compatibility code points and compound components per member
  - The character tables (code point -> member) and composition tables
    ((base, base) -> compound member) derived from them

Only modern-usage jamo are listed, i.e. the ones that take part in the
precomposed syllable range U+AC00..U+D7A3.

Notes:
  - Plain consonants are members of *both* Lead and Tail. The two families are
    kept as separate enums on purpose; their code points and compound sets differ.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, TypeVar

from korean_utils.domain.errors import JamoComposeError


J = TypeVar("J", bound="Jamo")


@dataclass(frozen=True)
class JamoForms:
    conjoining: str
    compatibility: str
    conjoining_components: str
    compatibility_components: str


def _forms(
    conjoining: str,
    compatibility: str,
    conjoining_components: str | None = None,
    compatibility_components: str | None = None,
) -> JamoForms:
    return JamoForms(
        conjoining=conjoining,
        compatibility=compatibility,
        conjoining_components=conjoining_components or conjoining,
        compatibility_components=compatibility_components or compatibility,
    )


class Jamo(Enum):
    """Behaviour shared by the three jamo families."""

    @property
    def conjoining(self) -> str:
        return self.value.conjoining

    @property
    def compatibility(self) -> str:
        return self.value.compatibility

    @property
    def index(self) -> int:
        """Position of this member within its family (used by syllable arithmetic)."""
        return _INDEX[self]

    @property
    def is_compound(self) -> bool:
        return len(self.value.compatibility_components) > 1

    def components(self, use_compatibility: bool = True) -> str:
        """Return the base jamo this member is built from.

        For a simple jamo this is the jamo itself; for a compound it is the
        ordered pair, e.g. ㄲ -> "ㄱㄱ", ㅘ -> "ㅗㅏ".
        """
        if use_compatibility:
            return self.value.compatibility_components
        return self.value.conjoining_components

    def compose(self: J, other: J) -> J:
        """Compose this jamo with `other` into a compound jamo.

        Raises:
            JamoComposeError: if the pair is not a compound in this family.
        """
        result = type(self).combine(self, other)
        if result is None:
            raise JamoComposeError(self, other)
        return result

    @classmethod
    def find(cls: type[J], character: str) -> Optional[J]:
        """Look up a member by conjoining or compatibility character."""
        return _CHARACTER_TABLES[cls].get(character)

    @classmethod
    def combine(cls: type[J], first: J, second: J) -> Optional[J]:
        """Return the compound formed by (first, second), or None."""
        return _COMPOSITION_TABLES[cls].get((first.compatibility, second.compatibility))

    @classmethod
    def from_index(cls: type[J], index: int) -> J:
        return _MEMBERS[cls][index]

    def __repr__(self) -> str:
        return "<%s.%s: %s>" % (type(self).__name__, self.name, self.compatibility)


# -----------------------------------------------------------------------------
# Families, in Unicode order
# -----------------------------------------------------------------------------

class Lead(Jamo):
    """Leading consonants (choseong), U+1100..U+1112."""

    KIYEOK = _forms("ᄀ", "ㄱ")
    SSANGKIYEOK = _forms("ᄁ", "ㄲ", "ᄀᄀ", "ㄱㄱ")
    NIEUN = _forms("ᄂ", "ㄴ")
    TIKEUT = _forms("ᄃ", "ㄷ")
    SSANGTIKEUT = _forms("ᄄ", "ㄸ", "ᄃᄃ", "ㄷㄷ")
    RIEUL = _forms("ᄅ", "ㄹ")
    MIEUM = _forms("ᄆ", "ㅁ")
    PIEUP = _forms("ᄇ", "ㅂ")
    SSANGPIEUP = _forms("ᄈ", "ㅃ", "ᄇᄇ", "ㅂㅂ")
    SIOS = _forms("ᄉ", "ㅅ")
    SSANGSIOS = _forms("ᄊ", "ㅆ", "ᄉᄉ", "ㅅㅅ")
    IEUNG = _forms("ᄋ", "ㅇ")
    CIEUC = _forms("ᄌ", "ㅈ")
    SSANGCIEUC = _forms("ᄍ", "ㅉ", "ᄌᄌ", "ㅈㅈ")
    CHIEUCH = _forms("ᄎ", "ㅊ")
    KHIEUKH = _forms("ᄏ", "ㅋ")
    THIEUTH = _forms("ᄐ", "ㅌ")
    PHIEUPH = _forms("ᄑ", "ㅍ")
    HIEUH = _forms("ᄒ", "ㅎ")


class Vowel(Jamo):
    """Vowels (jungseong), U+1161..U+1175."""

    A = _forms("ᅡ", "ㅏ")
    AE = _forms("ᅢ", "ㅐ")
    YA = _forms("ᅣ", "ㅑ")
    YAE = _forms("ᅤ", "ㅒ")
    EO = _forms("ᅥ", "ㅓ")
    E = _forms("ᅦ", "ㅔ")
    YEO = _forms("ᅧ", "ㅕ")
    YE = _forms("ᅨ", "ㅖ")
    O = _forms("ᅩ", "ㅗ")
    WA = _forms("ᅪ", "ㅘ", "ᅩᅡ", "ㅗㅏ")
    WAE = _forms("ᅫ", "ㅙ", "ᅩᅢ", "ㅗㅐ")
    OE = _forms("ᅬ", "ㅚ", "ᅩᅵ", "ㅗㅣ")
    YO = _forms("ᅭ", "ㅛ")
    U = _forms("ᅮ", "ㅜ")
    WEO = _forms("ᅯ", "ㅝ", "ᅮᅥ", "ㅜㅓ")
    WE = _forms("ᅰ", "ㅞ", "ᅮᅦ", "ㅜㅔ")
    WI = _forms("ᅱ", "ㅟ", "ᅮᅵ", "ㅜㅣ")
    YU = _forms("ᅲ", "ㅠ")
    EU = _forms("ᅳ", "ㅡ")
    YI = _forms("ᅴ", "ㅢ", "ᅳᅵ", "ㅡㅣ")
    I = _forms("ᅵ", "ㅣ")


class Tail(Jamo):
    """Trailing consonants (jongseong), U+11A8..U+11C2. "No tail" is None."""

    KIYEOK = _forms("ᆨ", "ㄱ")
    SSANGKIYEOK = _forms("ᆩ", "ㄲ", "ᆨᆨ", "ㄱㄱ")
    KIYEOK_SIOS = _forms("ᆪ", "ㄳ", "ᆨᆺ", "ㄱㅅ")
    NIEUN = _forms("ᆫ", "ㄴ")
    NIEUN_CIEUC = _forms("ᆬ", "ㄵ", "ᆫᆽ", "ㄴㅈ")
    NIEUN_HIEUH = _forms("ᆭ", "ㄶ", "ᆫᇂ", "ㄴㅎ")
    TIKEUT = _forms("ᆮ", "ㄷ")
    RIEUL = _forms("ᆯ", "ㄹ")
    RIEUL_KIYEOK = _forms("ᆰ", "ㄺ", "ᆯᆨ", "ㄹㄱ")
    RIEUL_MIEUM = _forms("ᆱ", "ㄻ", "ᆯᆷ", "ㄹㅁ")
    RIEUL_PIEUP = _forms("ᆲ", "ㄼ", "ᆯᆸ", "ㄹㅂ")
    RIEUL_SIOS = _forms("ᆳ", "ㄽ", "ᆯᆺ", "ㄹㅅ")
    RIEUL_THIEUTH = _forms("ᆴ", "ㄾ", "ᆯᇀ", "ㄹㅌ")
    RIEUL_PHIEUPH = _forms("ᆵ", "ㄿ", "ᆯᇁ", "ㄹㅍ")
    RIEUL_HIEUH = _forms("ᆶ", "ㅀ", "ᆯᇂ", "ㄹㅎ")
    MIEUM = _forms("ᆷ", "ㅁ")
    PIEUP = _forms("ᆸ", "ㅂ")
    PIEUP_SIOS = _forms("ᆹ", "ㅄ", "ᆸᆺ", "ㅂㅅ")
    SIOS = _forms("ᆺ", "ㅅ")
    SSANGSIOS = _forms("ᆻ", "ㅆ", "ᆺᆺ", "ㅅㅅ")
    IEUNG = _forms("ᆼ", "ㅇ")
    CIEUC = _forms("ᆽ", "ㅈ")
    CHIEUCH = _forms("ᆾ", "ㅊ")
    KHIEUKH = _forms("ᆿ", "ㅋ")
    THIEUTH = _forms("ᇀ", "ㅌ")
    PHIEUPH = _forms("ᇁ", "ㅍ")
    HIEUH = _forms("ᇂ", "ㅎ")


FAMILIES: Final[tuple[type[Jamo], ...]] = (Lead, Vowel, Tail)

LEAD_COUNT: Final[int] = len(Lead)
VOWEL_COUNT: Final[int] = len(Vowel)
# Index 0 of the tail position means "no tail"
TAIL_COUNT: Final[int] = len(Tail) + 1


# -----------------------------------------------------------------------------
# Derived lookup tables (built once at import, read-only afterwards)
# -----------------------------------------------------------------------------

def _character_table(family: type[Jamo]) -> dict[str, Jamo]:
    table: dict[str, Jamo] = {}
    for member in family:
        table[member.conjoining] = member
        table[member.compatibility] = member
    return table


def _composition_table(family: type[Jamo]) -> dict[tuple[str, str], Jamo]:
    table: dict[tuple[str, str], Jamo] = {}
    for member in family:
        if not member.is_compound:
            continue
        for components in (member.components(True), member.components(False)):
            first, second = components
            table[(first, second)] = member
    return table


_MEMBERS: Final[dict[type[Jamo], tuple[Jamo, ...]]] = {family: tuple(family) for family in FAMILIES}
_INDEX: Final[dict[Jamo, int]] = {
    member: i for family in FAMILIES for i, member in enumerate(family)
}
_CHARACTER_TABLES: Final[dict[type[Jamo], dict[str, Jamo]]] = {
    family: _character_table(family) for family in FAMILIES
}
_COMPOSITION_TABLES: Final[dict[type[Jamo], dict[tuple[str, str], Jamo]]] = {
    family: _composition_table(family) for family in FAMILIES
}


def lead_for_tail(tail: Tail) -> Optional[Lead]:
    """Return the leading consonant with the same compatibility character, if any.

    Compound tails such as ㄳ or ㄺ have no leading equivalent.
    """
    return Lead.find(tail.compatibility)


def tail_for_lead(lead: Lead) -> Optional[Tail]:
    """Return the trailing consonant with the same compatibility character, if any.

    ㄸ, ㅃ and ㅉ never occur in tail position.
    """
    return Tail.find(lead.compatibility)
