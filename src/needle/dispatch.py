"""
Runtime dispatch over needle-like values.

Lets callers accept a plain string, a compiled pattern, a function or any
Needle as one parameter and treat them all the same way.
"""

import logging
import re
from collections.abc import Callable, Iterable

from .exceptions import UnsupportedNeedleError
from .needles import Needle, PredicateNeedle
from .registry import find_adapter_class

logger = logging.getLogger(__name__)

NeedleLike = Needle | str | re.Pattern[str] | Callable[[str], bool]


def as_needle(value: NeedleLike) -> Needle:
    """
    Coerce a needle-like value into a Needle.

    Resolution order:
    1. Needle instances are returned unchanged
    2. The adapter registered for the value's type (or its closest base)
    3. Any other callable is wrapped in a PredicateNeedle

    Args:
        value: A Needle, string, compiled pattern or single-argument predicate

    Returns:
        A Needle equivalent to the value

    Raises:
        UnsupportedNeedleError: If the value cannot be used as a needle
    """
    if isinstance(value, Needle):
        return value

    adapter_class = find_adapter_class(type(value))
    if adapter_class is not None:
        logger.debug("Coercing %s to %s", type(value).__name__, adapter_class.__name__)
        return adapter_class.from_value(value)

    if callable(value):
        logger.debug("Coercing callable %r to PredicateNeedle", value)
        return PredicateNeedle.from_value(value)

    raise UnsupportedNeedleError(
        f"Cannot use value of type '{type(value).__name__}' as a needle",
        value_type=type(value),
    )


def is_match(needle: NeedleLike, candidate: str) -> bool:
    """Test a candidate against any needle-like value."""
    return as_needle(needle).is_match(candidate)


def is_match_in(needle: NeedleLike, candidates: Iterable[str]) -> bool:
    """
    Test whether any candidate matches a needle-like value.

    Stops consuming candidates at the first match. The needle is coerced once
    before any candidate is pulled.
    """
    return as_needle(needle).is_match_in(candidates)
