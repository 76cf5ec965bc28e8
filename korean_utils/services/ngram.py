from __future__ import annotations

"""Jamo N-grams for fuzzy Korean search indexes.

Each whitespace-separated word is decomposed into compatibility jamo and a
window of `length` jamo slides over the result. Windows are recomposed into
syllables unless `split_compounds` is set, so "홍길동" yields "호", "ㅗㅇ", ...
"""

import re
from typing import Final, Optional

from korean_utils.domain.composition import compose
from korean_utils.domain.decomposition import decompose

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")


def ngram(text: Optional[str], length: int, split_compounds: bool = False) -> list[str]:
    """Return the jamo N-grams of `text`.

    Raises:
        ValueError: if `length` is not positive.
    """
    if length <= 0:
        raise ValueError("ngram length must be positive, got %d" % length)
    if not text:
        return []

    grams: list[str] = []
    for word in _WHITESPACE.split(text):
        if not word:
            continue
        jamo = decompose(word, use_compatibility=True, split_compounds=split_compounds)
        for i in range(len(jamo) - length + 1):
            window = jamo[i:i + length]
            grams.append(window if split_compounds else compose(window))
    return grams
