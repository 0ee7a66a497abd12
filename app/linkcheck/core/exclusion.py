"""Link exclusion matching."""

import logging
from collections.abc import Iterable

from linkcheck.models.pattern import LinkPattern

logger = logging.getLogger(__name__)


class ExclusionMatcher:
    """Decides whether a link should be skipped.

    A link is skipped when any of the exclusion patterns matches it.
    Patterns are tried in order and matching stops at the first hit.

    Args:
        patterns: Exclusion patterns in config order.
    """

    def __init__(self, patterns: Iterable[LinkPattern]) -> None:
        self._patterns = tuple(patterns)

    @property
    def patterns(self) -> tuple[LinkPattern, ...]:
        """Exclusion patterns in config order."""
        return self._patterns

    def should_skip(self, link: str) -> bool:
        """Check if a link matches at least one exclusion pattern.

        Args:
            link: The link (URL or path) to test.

        Returns:
            True if the link should be skipped. Always False without patterns.
        """
        for pattern in self._patterns:
            if pattern.matches(link):
                logger.debug("Skipping %s (excluded by %r)", link, pattern.source)
                return True
        return False
