"""
StringMatch needle.

A configurable string matcher with three match-length modes (full, partial and
whole-word) and optional case folding.
"""

from typing import Any, ClassVar

from pydantic import Field, field_validator

from .base import NeedleModel
from ..constants import DEFAULT_CASE_SENSITIVE, DEFAULT_MATCH_LENGTH, MatchLength, NeedleKind
from ..registry import register


def _contains_words(candidate_words: list[str], needle_words: list[str]) -> bool:
    """Return True if needle_words occurs as a contiguous run inside candidate_words."""
    width = len(needle_words)
    return any(
        candidate_words[start:start + width] == needle_words
        for start in range(len(candidate_words) - width + 1)
    )


@register(NeedleKind.STRING_MATCH)
class StringMatch(NeedleModel):
    """
    Matches candidates against a piece of text with configurable length and case modes.

    A new StringMatch is a full, case-sensitive match. The builder methods
    `partial()`, `full()`, `word()`, `case_sensitive()` and `case_insensitive()`
    each return a reconfigured copy, so they can be chained and the last call
    wins:

        StringMatch("error").word().case_insensitive()

    Word mode treats any run of whitespace as a delimiter. A needle with no
    words in it (empty or whitespace only) falls back to a full comparison.
    """

    model_config: ClassVar[dict[str, Any]] = {
        'validate_by_name': True,
        'validate_by_alias': True,
        'serialize_by_alias': True,
    }

    text: str = Field(..., description="Needle text to compare candidates against")
    match_length: MatchLength = Field(
        DEFAULT_MATCH_LENGTH,
        description="Whether the needle must cover the full candidate, any part of it, or whole words",  # noqa: E501
    )
    is_case_sensitive: bool = Field(
        DEFAULT_CASE_SENSITIVE,
        alias='case_sensitive',
        description="If false, needle and candidate are lowercased before comparing",
    )

    def __init__(self, text: str | None = None, /, **data: Any) -> None:  # noqa: ANN401
        """Build from positional text, e.g. StringMatch("abc"), or from keyword fields."""
        if text is not None:
            data['text'] = text
        super().__init__(**data)

    @field_validator('text', mode='before')
    @classmethod
    def normalize_text(cls, value: object) -> object:
        """Copy str subclasses into a plain str."""
        if isinstance(value, str):
            return str(value)
        return value

    @property
    def is_full_match(self) -> bool:
        """True if the needle has to equal the whole candidate."""
        return self.match_length == MatchLength.FULL

    @property
    def is_partial_match(self) -> bool:
        """True if the needle may appear anywhere in the candidate."""
        return self.match_length == MatchLength.PARTIAL

    @property
    def is_word_match(self) -> bool:
        """True if the needle has to appear as whole words."""
        return self.match_length == MatchLength.WORD

    def full(self) -> 'StringMatch':
        """Return a copy that matches only the whole candidate."""
        return self.model_copy(update={'match_length': MatchLength.FULL})

    def partial(self) -> 'StringMatch':
        """Return a copy that matches the needle anywhere in the candidate."""
        return self.model_copy(update={'match_length': MatchLength.PARTIAL})

    def word(self) -> 'StringMatch':
        """Return a copy that matches the needle as whole words."""
        return self.model_copy(update={'match_length': MatchLength.WORD})

    def case_sensitive(self) -> 'StringMatch':
        """Return a copy that compares case exactly."""
        return self.model_copy(update={'is_case_sensitive': True})

    def case_insensitive(self) -> 'StringMatch':
        """Return a copy that lowercases both sides before comparing."""
        return self.model_copy(update={'is_case_sensitive': False})

    def is_match(self, candidate: str) -> bool:  # noqa: D102
        needle = self.text
        if not self.is_case_sensitive:
            needle = needle.lower()
            candidate = candidate.lower()

        if self.match_length == MatchLength.PARTIAL:
            return needle in candidate

        if self.match_length == MatchLength.WORD:
            needle_words = needle.split()
            if needle_words:
                return _contains_words(candidate.split(), needle_words)

        return needle == candidate
