"""Unit tests for LinkPattern."""

import pytest
from linkcheck.models.pattern import LinkPattern


class TestLinkPattern:
    """Tests for LinkPattern."""

    def test_matches_anywhere(self) -> None:
        """Patterns are searched, not anchored."""
        pattern = LinkPattern(r"google\.com")

        assert pattern.matches("https://www.google.com/search")
        assert not pattern.matches("https://googleXcom")

    def test_anchors_are_honored(self) -> None:
        """Explicit anchors restrict matching."""
        pattern = LinkPattern(r"^https://")

        assert pattern.matches("https://example.com")
        assert not pattern.matches("see https://example.com")

    def test_equality_by_source(self) -> None:
        """Patterns with the same source are equal and hash equally."""
        assert LinkPattern("a+") == LinkPattern("a+")
        assert hash(LinkPattern("a+")) == hash(LinkPattern("a+"))
        assert LinkPattern("a+") != LinkPattern("a*")

    def test_usable_as_dict_key(self) -> None:
        """A freshly built pattern finds an existing dict entry."""
        mapping = {LinkPattern("https"): 1}

        assert mapping[LinkPattern("https")] == 1

    def test_invalid_regex(self) -> None:
        """Invalid regular expressions are rejected."""
        with pytest.raises(ValueError, match="Invalid pattern"):
            LinkPattern("(unclosed")

    def test_str_and_repr(self) -> None:
        """str() is the source; repr() names the class."""
        pattern = LinkPattern(r"\.pdf$")

        assert str(pattern) == r"\.pdf$"
        assert repr(pattern) == r"LinkPattern('\\.pdf$')"
