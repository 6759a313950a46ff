"""
Needle implementations.

Importing this package registers the standard needle kinds with the registry.
"""

from .base import Needle, NeedleModel

# Import all needles to trigger registration
from .string_match import StringMatch
from .literal import StringNeedle
from .regex import RegexNeedle
from .predicate import PredicateNeedle

__all__ = [
    "Needle",
    "NeedleModel",
    "PredicateNeedle",
    "RegexNeedle",
    "StringMatch",
    "StringNeedle",
]
