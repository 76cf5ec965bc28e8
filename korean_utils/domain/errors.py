from __future__ import annotations

"""Domain exceptions.

Both derive from ValueError so callers that already guard jamo/syllable
input with `except ValueError` keep working.
"""


class ConstructionError(ValueError):
    """Raised when a Syllable is built from an illegal lead/vowel/tail combination."""


class JamoComposeError(ValueError):
    """Raised when two jamo do not form a compound jamo."""

    def __init__(self, first: object, second: object) -> None:
        super().__init__("Cannot compose %r with %r" % (first, second))
        self.first = first
        self.second = second
