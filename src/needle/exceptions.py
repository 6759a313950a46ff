"""
Custom exception hierarchy for needle.

Matching itself never raises; these errors come from the boundaries where
needles are built or coerced.
"""


class NeedleError(Exception):
    """Base exception for needle package."""

    pass


class ValidationError(NeedleError):
    """Malformed input given when constructing a needle."""

    pass


class UnsupportedNeedleError(NeedleError):
    """
    Raised when a value cannot be used as a needle.

    Carries the offending value's type so callers can report it.
    """

    def __init__(self, message: str, value_type: type | None = None):
        super().__init__(message)
        self.value_type = value_type
