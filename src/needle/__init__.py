"""
needle - one matching abstraction for strings, configurable matchers, regexes and predicates.

Accept a single "needle" parameter and let callers pass whichever kind of
match criterion suits them.
"""

from .constants import DEFAULT_CASE_SENSITIVE, DEFAULT_MATCH_LENGTH, MatchLength, NeedleKind
# Import needles to trigger registration of the standard kinds
from .needles import (
    Needle,
    NeedleModel,
    PredicateNeedle,
    RegexNeedle,
    StringMatch,
    StringNeedle,
)
from .dispatch import NeedleLike, as_needle, is_match, is_match_in
from .promotion import (
    match_case_insensitive,
    match_case_sensitive,
    match_full,
    match_partial,
    match_word,
)
from .registry import get_needle_class, list_registered_needles, register
from .schema_generator import generate_needle_schema, generate_needles_schema
from .exceptions import NeedleError, UnsupportedNeedleError, ValidationError

__version__ = "0.1.0"
__all__ = [
    # Constants and enums
    "DEFAULT_CASE_SENSITIVE",
    "DEFAULT_MATCH_LENGTH",
    "MatchLength",
    # Needle classes
    "Needle",
    "NeedleError",
    "NeedleKind",
    "NeedleLike",
    "NeedleModel",
    "PredicateNeedle",
    "RegexNeedle",
    "StringMatch",
    "StringNeedle",
    "UnsupportedNeedleError",
    "ValidationError",
    # Dispatch
    "as_needle",
    # Schema generators
    "generate_needle_schema",
    "generate_needles_schema",
    # Registry functions
    "get_needle_class",
    "is_match",
    "is_match_in",
    "list_registered_needles",
    # Promotion shortcuts
    "match_case_insensitive",
    "match_case_sensitive",
    "match_full",
    "match_partial",
    "match_word",
    "register",
]
