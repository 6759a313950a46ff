"""Predicate function needle."""

from collections.abc import Callable

from pydantic import Field, field_validator

from .base import NeedleModel
from ..constants import NeedleKind
from ..exceptions import ValidationError
from ..registry import register


@register(NeedleKind.PREDICATE)
class PredicateNeedle(NeedleModel):
    """
    Matches whenever the wrapped function returns a truthy value for the candidate.

    The function receives the candidate string as its only argument. Any
    callable that is not already a Needle is wrapped in this class when it is
    passed where a needle is expected.
    """

    function: Callable[[str], bool] = Field(
        ...,
        description="Function called with the candidate; its result decides the match",
    )

    def __init__(self, function: Callable[[str], bool] | None = None, /, **data: object) -> None:
        if function is not None:
            data['function'] = function
        super().__init__(**data)

    @field_validator('function', mode='before')
    @classmethod
    def require_callable(cls, value: object) -> object:
        """Reject values that cannot be called."""
        if not callable(value):
            raise ValidationError(
                f"Predicate needle requires a callable, got {type(value).__name__}",
            )
        return value

    @classmethod
    def from_value(cls, value: Callable[[str], bool]) -> 'PredicateNeedle':  # noqa: D102
        return cls(value)

    def is_match(self, candidate: str) -> bool:  # noqa: D102
        return bool(self.function(candidate))
