"""
korean_utils package exports.

Domain modules (jamo tables, syllable model, composition, search) live under
`korean_utils.domain`; add-ons built on them live under `korean_utils.services`.
This file provides the stable import surface.
"""

from .domain.errors import ConstructionError, JamoComposeError  # noqa: F401
from .domain.jamo import Lead, Tail, Vowel  # noqa: F401
from .domain.syllable import Syllable, convert, is_hangul  # noqa: F401
from .domain.composition import Boundary, Extended, compose, compose_char  # noqa: F401
from .domain.decomposition import decompose, decompose_syllable  # noqa: F401
from .domain.search import contains, contains_hangul, ends_with, include, starts_with  # noqa: F401

from .services.josa import Josa, attach_josa  # noqa: F401
from .services.keyboard import english_typed_to_korean, korean_typed_to_english  # noqa: F401
from .services.ngram import ngram  # noqa: F401
from .services.settings_store import SettingsStore  # noqa: F401
from .services.text_length import length  # noqa: F401

__all__ = [
    "Lead",
    "Vowel",
    "Tail",
    "Syllable",
    "Extended",
    "Boundary",
    "ConstructionError",
    "JamoComposeError",
    "is_hangul",
    "convert",
    "compose_char",
    "compose",
    "decompose_syllable",
    "decompose",
    "include",
    "contains",
    "starts_with",
    "ends_with",
    "contains_hangul",
    "Josa",
    "attach_josa",
    "ngram",
    "length",
    "english_typed_to_korean",
    "korean_typed_to_english",
    "SettingsStore",
]
