"""
Shortcuts for turning a plain string into a configured StringMatch.

Each helper is the StringMatch constructor followed by one builder call:

    match_word("error") == StringMatch("error").word()
"""

from .needles.string_match import StringMatch


def match_full(text: str) -> StringMatch:
    """StringMatch that must equal the whole candidate."""
    return StringMatch(text).full()


def match_partial(text: str) -> StringMatch:
    """StringMatch that may appear anywhere in the candidate."""
    return StringMatch(text).partial()


def match_word(text: str) -> StringMatch:
    """StringMatch that must appear as whole words."""
    return StringMatch(text).word()


def match_case_sensitive(text: str) -> StringMatch:
    """StringMatch that compares case exactly."""
    return StringMatch(text).case_sensitive()


def match_case_insensitive(text: str) -> StringMatch:
    """StringMatch that lowercases both sides before comparing."""
    return StringMatch(text).case_insensitive()
