"""Exact string needle."""

from pydantic import Field, field_validator

from .base import NeedleModel
from .string_match import StringMatch
from ..constants import NeedleKind
from ..registry import register


@register(NeedleKind.STRING, source_type=str)
class StringNeedle(NeedleModel):
    """
    Matches a candidate only if it equals the text exactly.

    Always a full, case-sensitive comparison with nothing to configure. Plain
    strings passed wherever a needle is expected are wrapped in this class.
    Use the match_* methods to promote it to a configurable StringMatch.
    """

    text: str = Field(..., description="Text the candidate must equal")

    def __init__(self, text: str | None = None, /, **data: object) -> None:
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

    @classmethod
    def from_value(cls, value: str) -> 'StringNeedle':  # noqa: D102
        return cls(value)

    def is_match(self, candidate: str) -> bool:  # noqa: D102
        return self.text == candidate

    def match_full(self) -> StringMatch:
        """Promote to a full-length StringMatch."""
        return StringMatch(self.text).full()

    def match_partial(self) -> StringMatch:
        """Promote to a partial StringMatch."""
        return StringMatch(self.text).partial()

    def match_word(self) -> StringMatch:
        """Promote to a whole-word StringMatch."""
        return StringMatch(self.text).word()

    def match_case_sensitive(self) -> StringMatch:
        """Promote to a case-sensitive StringMatch."""
        return StringMatch(self.text).case_sensitive()

    def match_case_insensitive(self) -> StringMatch:
        """Promote to a case-insensitive StringMatch."""
        return StringMatch(self.text).case_insensitive()
