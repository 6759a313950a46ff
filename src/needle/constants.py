"""
Constants and enums for needle.

All enums inherit from str so they serialize to their plain values and can be
used interchangeably with those strings.
"""

from enum import Enum


class MatchLength(str, Enum):
    """
    How much of the candidate a StringMatch needle has to cover.

    - FULL: the needle must equal the whole candidate
    - PARTIAL: the needle may appear anywhere as a substring
    - WORD: the needle must appear as whole, whitespace-delimited words
    """

    FULL = 'full'
    PARTIAL = 'partial'
    WORD = 'word'

    def __str__(self) -> str:
        """Return the enum value as string."""
        return str(self.value)


class NeedleKind(str, Enum):
    """Needle kinds known to the adapter registry."""

    STRING = 'string'
    STRING_MATCH = 'string_match'
    REGEX = 'regex'
    PREDICATE = 'predicate'

    def __str__(self) -> str:
        """Return the enum value as string."""
        return str(self.value)


DEFAULT_MATCH_LENGTH = MatchLength.FULL
DEFAULT_CASE_SENSITIVE = True
