from __future__ import annotations

"""Incremental Hangul composition (domain layer).

`compose_char()` folds one input character into the syllable accumulated so
far. The outcome is a tagged result:

  - Extended(syllable): the character was absorbed into the current block
  - Boundary(completed, next): the current block is finished; composition
    continues with `next`, which may already carry a consonant taken over
    from the completed block (한 + ㅏ -> 하 | 나)

Boundaries are normal outcomes, not errors.

Primary API:
  - compose_char(current, incoming)
  - compose(text)
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Union

from korean_utils.domain.jamo import Lead, Tail, Vowel, lead_for_tail
from korean_utils.domain.syllable import EMPTY, Syllable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Extended:
    syllable: Syllable


@dataclass(frozen=True)
class Boundary:
    completed: Syllable
    next: Syllable


Composition = Union[Extended, Boundary]


# -----------------------------------------------------------------------------
# Single-character step
# -----------------------------------------------------------------------------

def compose_char(current: Syllable, incoming: str) -> Composition:
    """Fold `incoming` into `current`.

    Args:
        current: the syllable accumulated so far (EMPTY at the start of input)
        incoming: a single character

    Returns:
        Extended when the block grows, Boundary when a new block starts.
    """
    if current.char is not None:
        # A passthrough character never takes jamo; start over from an empty block.
        return Boundary(current, _start(incoming))

    lead = Lead.find(incoming)
    vowel = Vowel.find(incoming)
    tail = Tail.find(incoming)

    if lead is not None and tail is not None:
        if current.vowel is None and current.tail is None:
            tail = None
        elif current.lead is None and current.vowel is not None and current.tail is None:
            return _boundary(current, Syllable.from_character(incoming))
        else:
            lead = None

    if lead is not None:
        return _compose_lead(current, lead)
    if vowel is not None:
        return _compose_vowel(current, vowel)
    if tail is not None:
        return _compose_tail(current, tail)
    return _boundary(current, Syllable.from_character(incoming))


def _compose_lead(current: Syllable, lead: Lead) -> Composition:
    if current.vowel is not None or current.tail is not None:
        return _boundary(current, Syllable(lead=lead))
    if current.lead is None:
        return Extended(Syllable(lead=lead))

    compound = Lead.combine(current.lead, lead)
    if compound is None:
        return _boundary(current, Syllable(lead=lead))
    return Extended(replace(current, lead=compound))


def _compose_vowel(current: Syllable, vowel: Vowel) -> Composition:
    if current.tail is not None:
        # The tail cannot share a block with a new vowel; it opens the next block.
        completed = Syllable(lead=current.lead, vowel=current.vowel)
        migrated = lead_for_tail(current.tail)
        if migrated is None:
            logger.warning(
                "Dropping trailing consonant %s of %s: it has no leading equivalent",
                current.tail.compatibility,
                current,
            )
            return _boundary(completed, Syllable(vowel=vowel))
        return _boundary(completed, Syllable(lead=migrated, vowel=vowel))

    if current.vowel is None:
        return Extended(replace(current, vowel=vowel))

    compound = Vowel.combine(current.vowel, vowel)
    if compound is None:
        return _boundary(current, Syllable(vowel=vowel))
    return Extended(replace(current, vowel=compound))


def _compose_tail(current: Syllable, tail: Tail) -> Composition:
    if (current.lead is None) != (current.vowel is None):
        return _boundary(current, Syllable(tail=tail))
    if current.tail is None:
        return Extended(replace(current, tail=tail))

    compound = Tail.combine(current.tail, tail)
    if compound is None:
        return _boundary(current, Syllable(tail=tail))
    return Extended(replace(current, tail=compound))


def _boundary(completed: Syllable, next_syllable: Syllable) -> Boundary:
    logger.debug("Block boundary: completed=%r next=%r", str(completed), str(next_syllable))
    return Boundary(completed, next_syllable)


def _start(incoming: str) -> Syllable:
    result = compose_char(EMPTY, incoming)
    if isinstance(result, Extended):
        return result.syllable
    return result.next


# -----------------------------------------------------------------------------
# String-level composition
# -----------------------------------------------------------------------------

def compose(text: Optional[str]) -> str:
    """Compose a jamo stream into Hangul syllables.

    Non-Hangul characters pass through unchanged; already composed text is
    returned as-is.

    Example:
        compose("ㄷㅏㄺㄱㅗㄱㅣ") -> "닭고기"
    """
    if not text:
        return ""

    out: list[str] = []
    current = EMPTY
    for ch in text:
        result = compose_char(current, ch)
        if isinstance(result, Boundary):
            if result.completed.scalar is not None:
                out.append(result.completed.scalar)
            current = result.next
        else:
            current = result.syllable

    if current.scalar is not None:
        out.append(current.scalar)
    return "".join(out)
