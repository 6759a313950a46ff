"""Tests for the regex needle."""

import re

import pytest
from pydantic import ValidationError as PydanticValidationError

from needle import NeedleKind, RegexNeedle


class TestRegexNeedleConstruction:
    """Test building RegexNeedle from patterns and pattern text."""

    def test_from_compiled_pattern(self):
        """A compiled pattern is kept with its flags."""
        pattern = re.compile("te", re.IGNORECASE)
        needle = RegexNeedle(pattern)

        assert needle.pattern.pattern == "te"
        assert needle.is_match("Test")

    def test_from_pattern_text(self):
        """Pattern text is compiled on construction."""
        needle = RegexNeedle(r"\d+")

        assert isinstance(needle.pattern, re.Pattern)
        assert needle.is_match("abc 123")

    def test_keyword_construction(self):
        """The pattern can be passed by name."""
        assert RegexNeedle(pattern="Te").is_match("Test")

    def test_compiled_pattern_flags_are_recorded(self):
        """The flags field mirrors the compiled pattern's flags."""
        pattern = re.compile("te", re.IGNORECASE | re.MULTILINE)
        assert RegexNeedle(pattern).flags == pattern.flags

    def test_pattern_text_with_flags(self):
        """Pattern text is compiled with the given flags."""
        needle = RegexNeedle("te", flags=re.IGNORECASE)

        assert needle.is_match("Test")
        assert needle == RegexNeedle(re.compile("te", re.IGNORECASE))

    def test_conflicting_flags_are_rejected(self):
        """Flags that disagree with an already compiled pattern are an error."""
        with pytest.raises(PydanticValidationError):
            RegexNeedle(re.compile("te"), flags=re.IGNORECASE)

    def test_invalid_pattern_fails_on_construction(self):
        """An invalid pattern is rejected before any matching happens."""
        with pytest.raises(PydanticValidationError):
            RegexNeedle("(unclosed")

    def test_kind(self):
        """RegexNeedle is registered as the regex kind."""
        assert RegexNeedle("a").kind == NeedleKind.REGEX


class TestRegexNeedleMatching:
    """Test that matching is delegated to the regex engine unchanged."""

    @pytest.mark.parametrize(("pattern", "expected"), [
        ("Test", True),
        ("Te", True),  # Regex is partial unless anchored.
        ("te", False),  # Regex is case-sensitive by default.
        (r"(?i)te", True),
        (r"\w+", True),
        (r"\w", True),
        (r"^T$", False),
        (r"^est", False),
        (r"Te$", False),
        (r"^T.+t$", True),
    ])
    def test_delegates_to_search(self, pattern, expected):
        """Anchors and inline flags are interpreted by the regex engine."""
        assert RegexNeedle(pattern).is_match("Test") is expected

    def test_empty_candidate(self):
        """An empty candidate only matches patterns that accept empty input."""
        assert not RegexNeedle("a").is_match("")
        assert RegexNeedle("^$").is_match("")

    def test_is_match_in(self):
        """Sequence search uses the pattern's search."""
        needle = RegexNeedle(r"^\d{3}$")
        assert needle.is_match_in(["abc", "1234", "123"])
        assert not needle.is_match_in(["abc", "1234"])
