"""Regex patterns used for link exclusion and header targeting."""

import re


class LinkPattern:
    """A compiled regular expression keyed by its source text.

    Two patterns are equal (and hash equally) when their sources are equal,
    so patterns can be used as dictionary keys.

    Args:
        source: Regular expression as written in the config.

    Raises:
        ValueError: If the source is not a valid regular expression.
    """

    __slots__ = ("_compiled", "_source")

    def __init__(self, source: str) -> None:
        try:
            self._compiled = re.compile(source)
        except re.error as e:
            msg = f"Invalid pattern `{source}`: {e}"
            raise ValueError(msg) from e
        self._source = source

    @property
    def source(self) -> str:
        """Regular expression as written in the config."""
        return self._source

    def matches(self, text: str) -> bool:
        """Check if the pattern is found anywhere in ``text``."""
        return self._compiled.search(text) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkPattern):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(self._source)

    def __repr__(self) -> str:
        return f"LinkPattern({self._source!r})"

    def __str__(self) -> str:
        return self._source
