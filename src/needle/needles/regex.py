"""
Regex needle.

Delegates matching to a compiled pattern from the standard library `re` module.
"""

import re
from typing import Any

from pydantic import Field, model_validator

from .base import NeedleModel
from ..constants import NeedleKind
from ..registry import register


@register(NeedleKind.REGEX, source_type=re.Pattern)
class RegexNeedle(NeedleModel):
    """
    Matches when the regular expression is found anywhere in the candidate.

    Anchors, inline flags such as (?i) and any flags the pattern was compiled
    with are left entirely to the regex engine: "Te" matches "Test", "^T$"
    does not. Pattern text is compiled when the needle is built, so an invalid
    pattern fails here and never at match time.

    The compiled pattern's flags are kept in `flags` and serialized next to
    the pattern source, so a reloaded needle compiles to the same pattern.
    """

    pattern: re.Pattern[str] = Field(
        ...,
        description="Compiled regular expression, or pattern text to compile",
    )
    flags: int = Field(
        0,
        description="re module flags the pattern is compiled with",
    )

    def __init__(self, pattern: re.Pattern[str] | str | None = None, /, **data: object) -> None:
        if pattern is not None:
            data['pattern'] = pattern
        super().__init__(**data)

    @model_validator(mode='before')
    @classmethod
    def compile_pattern(cls, data: Any) -> Any:  # noqa: ANN401
        """Compile pattern text with `flags` and record the compiled pattern's flags."""
        if not isinstance(data, dict):
            return data

        pattern = data.get('pattern')
        flags = data.get('flags')
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern, flags or 0)
            except re.error as e:
                raise ValueError(f"Invalid regex pattern '{pattern}': {e!s}") from e
        elif isinstance(pattern, re.Pattern):
            if flags is not None and flags != pattern.flags:
                raise ValueError(
                    f"flags {flags} do not match the compiled pattern's flags {pattern.flags}",
                )
        else:
            return data

        return {**data, 'pattern': pattern, 'flags': pattern.flags}

    @classmethod
    def from_value(cls, value: re.Pattern[str]) -> 'RegexNeedle':  # noqa: D102
        return cls(value)

    def is_match(self, candidate: str) -> bool:  # noqa: D102
        return self.pattern.search(candidate) is not None
